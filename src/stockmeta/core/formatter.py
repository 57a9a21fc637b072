"""Title and keyword formatting pipeline."""
from __future__ import annotations

from stockmeta.models.config import FormatConfig
from stockmeta.models.result import FormattedResult, RawInput
from stockmeta.utils.logging import get_logger
from stockmeta.utils.text import (
    build_word_pattern,
    collapse_whitespace,
    split_comma_list,
)

logger = get_logger("formatter")


class MetadataFormatter:
    """Turn raw title and keyword input into upload-ready metadata."""

    def __init__(self, config: FormatConfig | None = None) -> None:
        self.config = config or FormatConfig()
        self._title_pattern = build_word_pattern(self.config.negative_title_words)
        self._negative_keywords = frozenset(self.config.negative_keywords)

    def format(self, raw: RawInput) -> FormattedResult:
        """Format a title and keyword list according to the config."""
        result = FormattedResult(
            title=self.format_title(raw.title),
            keywords=self.format_keywords(raw.keywords_csv),
        )
        logger.debug(
            "Formatted title (%d chars) and %d keywords",
            len(result.title),
            len(result.keywords),
        )
        return result

    def format_title(self, title: str) -> str:
        """Clean a title.

        Negative words are removed as whole words, then prefix and suffix
        are attached to non-empty titles, then the result is cut to the
        length limit.
        """
        title = title.strip()

        if self._title_pattern is not None:
            title = collapse_whitespace(self._title_pattern.sub('', title))

        # Never decorate an empty title
        if title:
            if self.config.prefix:
                title = f"{self.config.prefix} {title}"
            if self.config.suffix:
                title = f"{title} {self.config.suffix}"

        return title[:self.config.max_title_length]

    def format_keywords(self, keywords_csv: str) -> tuple[str, ...]:
        """Split, filter and cap a comma-separated keyword list.

        Negative keywords are matched exactly, ignoring case. Duplicates
        are kept.
        """
        keywords = split_comma_list(keywords_csv)

        if self._negative_keywords:
            kept = [k for k in keywords if k.lower() not in self._negative_keywords]
            if len(kept) != len(keywords):
                logger.debug("Dropped %d negative keywords", len(keywords) - len(kept))
            keywords = kept

        return tuple(keywords[:self.config.max_tags])


def format_title(title: str, config: FormatConfig | None = None) -> str:
    """Format a single title."""
    return MetadataFormatter(config).format_title(title)


def format_keywords(
    keywords_csv: str,
    config: FormatConfig | None = None,
) -> tuple[str, ...]:
    """Format a comma-separated keyword list."""
    return MetadataFormatter(config).format_keywords(keywords_csv)


# Convenience function
def format_metadata(
    raw: RawInput,
    config: FormatConfig | None = None,
) -> FormattedResult:
    """Format raw metadata input.

    This is the main entry point for the library.

    Args:
        raw: Title and comma-separated keywords as typed
        config: Formatting constraints (defaults apply when omitted)

    Returns:
        FormattedResult with the cleaned title and keyword sequence
    """
    return MetadataFormatter(config).format(raw)
