"""Text helpers shared by the formatter and the input counters."""
from __future__ import annotations

import math
import re
from collections.abc import Iterable

_WHITESPACE_RUN = re.compile(r'\s+')
_LEADING_INT = re.compile(r'^\s*([+-]?\d+)')


def split_comma_list(text: str | None) -> list[str]:
    """Split a comma-delimited string into trimmed, non-empty tokens.

    Order is preserved and duplicates are kept.
    """
    if not text:
        return []
    return [token.strip() for token in text.split(',') if token.strip()]


def normalize_word_list(words: str | Iterable[str] | None) -> tuple[str, ...]:
    """Lower-case, trim and de-duplicate a list of filter words.

    Args:
        words: A comma-separated string or an iterable of strings.

    Returns:
        Tuple of unique non-empty words in first-seen order.
    """
    if words is None:
        return ()
    if isinstance(words, str):
        tokens = split_comma_list(words)
    elif not isinstance(words, Iterable):
        raise ValueError(
            f"expected a string or a list of words, got {type(words).__name__}"
        )
    else:
        tokens = [str(word).strip() for word in words]

    seen: dict[str, None] = {}
    for token in tokens:
        lowered = token.lower()
        if lowered:
            seen.setdefault(lowered, None)
    return tuple(seen)


def collapse_whitespace(text: str) -> str:
    """Collapse whitespace runs into single spaces and trim the ends."""
    return _WHITESPACE_RUN.sub(' ', text).strip()


def parse_leading_int(value: object) -> int | None:
    """Parse an integer the way a lenient form field would.

    Leading whitespace and a sign are allowed, trailing garbage is ignored
    (``"12px"`` gives 12). Returns None when there are no leading digits.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else None
    match = _LEADING_INT.match(str(value))
    if not match:
        return None
    return int(match.group(1))


def build_word_pattern(words: Iterable[str]) -> re.Pattern[str] | None:
    """Compile a case-insensitive whole-word pattern matching any of ``words``.

    Words are matched as literal text. Longer words come first in the
    alternation so multi-word entries win over their own prefixes.
    """
    ordered = sorted({w for w in words if w}, key=lambda w: (-len(w), w))
    if not ordered:
        return None
    alternation = '|'.join(re.escape(word) for word in ordered)
    return re.compile(rf'\b(?:{alternation})\b', re.IGNORECASE | re.ASCII)
