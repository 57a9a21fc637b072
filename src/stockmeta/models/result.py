"""Input and result models for metadata formatting."""
from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

KEYWORD_SEPARATOR = ", "


class RawInput(BaseModel):
    """Title and keywords exactly as the user typed them."""

    model_config = ConfigDict(frozen=True)

    title: str = ""
    keywords_csv: str = ""

    @field_validator("title", "keywords_csv", mode="before")
    @classmethod
    def _none_to_empty(cls, value: Any) -> str:
        return "" if value is None else value


class FormattedResult(BaseModel):
    """Cleaned title and keyword list ready for upload."""

    model_config = ConfigDict(frozen=True)

    title: str = ""
    keywords: tuple[str, ...] = Field(default_factory=tuple)

    @property
    def keywords_text(self) -> str:
        """Keywords joined the way marketplaces expect them."""
        return KEYWORD_SEPARATOR.join(self.keywords)

    def to_dict(self) -> dict[str, Any]:
        """Return the result with keywords in their joined form."""
        return {"title": self.title, "keywords": self.keywords_text}


class CsvRow(BaseModel):
    """One data row of a metadata CSV export."""

    model_config = ConfigDict(frozen=True)

    filename: str
    title: str
    keywords: str
    category: str

    @classmethod
    def from_result(
        cls,
        result: FormattedResult,
        category: str,
        filename: str,
    ) -> "CsvRow":
        return cls(
            filename=filename,
            title=result.title,
            keywords=result.keywords_text,
            category=category,
        )

    def values(self) -> list[str]:
        """Field values in header order."""
        return [self.filename, self.title, self.keywords, self.category]


class InputCounts(BaseModel):
    """Character and tag counters for unprocessed input."""

    title_length: int
    max_title_length: int
    tag_count: int
    max_tags: int

    @property
    def title_over_limit(self) -> bool:
        return self.title_length > self.max_title_length

    @property
    def tags_over_limit(self) -> bool:
        return self.tag_count > self.max_tags

    @property
    def title_label(self) -> str:
        return f"{self.title_length} / {self.max_title_length} chars"

    @property
    def tags_label(self) -> str:
        return f"{self.tag_count} / {self.max_tags} tags"
