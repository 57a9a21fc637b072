"""Formatting configuration."""
from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from stockmeta.utils.logging import get_logger
from stockmeta.utils.text import normalize_word_list, parse_leading_int

logger = get_logger("config")

DEFAULT_MAX_TAGS = 50
DEFAULT_MAX_TITLE_LENGTH = 200


class FormatConfig(BaseModel):
    """Constraints applied when formatting a title and keyword list.

    Limits accept ints or raw form strings; anything that does not parse to
    a positive integer falls back to the default.
    """

    model_config = ConfigDict(frozen=True)

    # Limits
    max_tags: int = DEFAULT_MAX_TAGS
    max_title_length: int = DEFAULT_MAX_TITLE_LENGTH

    # Title decoration
    prefix: str = ""
    suffix: str = ""

    # Filters
    negative_keywords: tuple[str, ...] = Field(default_factory=tuple)
    negative_title_words: tuple[str, ...] = Field(default_factory=tuple)

    @field_validator("max_tags", mode="before")
    @classmethod
    def _default_max_tags(cls, value: Any) -> int:
        return _positive_or_default(value, DEFAULT_MAX_TAGS, "max_tags")

    @field_validator("max_title_length", mode="before")
    @classmethod
    def _default_max_title_length(cls, value: Any) -> int:
        return _positive_or_default(
            value, DEFAULT_MAX_TITLE_LENGTH, "max_title_length"
        )

    @field_validator("prefix", "suffix", mode="before")
    @classmethod
    def _strip_affix(cls, value: Any) -> str:
        return "" if value is None else str(value).strip()

    @field_validator("negative_keywords", "negative_title_words", mode="before")
    @classmethod
    def _normalize_words(cls, value: Any) -> tuple[str, ...]:
        return normalize_word_list(value)

    @classmethod
    def from_form(
        cls,
        max_tags: str | None = None,
        max_title_length: str | None = None,
        prefix: str | None = None,
        suffix: str | None = None,
        negative_keywords: str | None = None,
        negative_title_words: str | None = None,
    ) -> "FormatConfig":
        """Build a config from raw form field values."""
        return cls(
            max_tags=max_tags,
            max_title_length=max_title_length,
            prefix=prefix,
            suffix=suffix,
            negative_keywords=negative_keywords,
            negative_title_words=negative_title_words,
        )

    @classmethod
    def from_json_file(cls, path: str | Path) -> "FormatConfig":
        """Load a config from a JSON file."""
        return cls.model_validate_json(Path(path).read_text(encoding="utf-8"))

    @classmethod
    def for_adobe_stock(cls) -> "FormatConfig":
        """Preset for Adobe Stock uploads."""
        return cls(max_tags=49, max_title_length=200)

    @classmethod
    def for_shutterstock(cls) -> "FormatConfig":
        """Preset for Shutterstock uploads."""
        return cls(max_tags=50, max_title_length=200)


def _positive_or_default(value: Any, default: int, field: str) -> int:
    parsed = parse_leading_int(value)
    if parsed is None or parsed <= 0:
        if value not in (None, ""):
            logger.debug("Invalid %s %r, using default %d", field, value, default)
        return default
    return parsed
