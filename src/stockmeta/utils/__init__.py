"""stockmeta utility functions."""
from stockmeta.utils.text import (
    build_word_pattern,
    collapse_whitespace,
    normalize_word_list,
    parse_leading_int,
    split_comma_list,
)

__all__ = [
    "build_word_pattern",
    "collapse_whitespace",
    "normalize_word_list",
    "parse_leading_int",
    "split_comma_list",
]
