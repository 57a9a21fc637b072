"""As-typed counters for title length and tag count."""
from __future__ import annotations

from stockmeta.models.config import FormatConfig
from stockmeta.models.result import InputCounts, RawInput
from stockmeta.utils.text import split_comma_list


def count_input(raw: RawInput, config: FormatConfig | None = None) -> InputCounts:
    """Count characters and tags of unprocessed input.

    The title is measured untrimmed, so the counts reflect what was typed
    rather than what the formatter would produce.
    """
    config = config or FormatConfig()
    return InputCounts(
        title_length=len(raw.title),
        max_title_length=config.max_title_length,
        tag_count=len(split_comma_list(raw.keywords_csv)),
        max_tags=config.max_tags,
    )
