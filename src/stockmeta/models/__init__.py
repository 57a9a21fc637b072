"""stockmeta data models."""
from stockmeta.models.config import FormatConfig
from stockmeta.models.result import (
    CsvRow,
    FormattedResult,
    InputCounts,
    RawInput,
)

__all__ = [
    "CsvRow",
    "FormatConfig",
    "FormattedResult",
    "InputCounts",
    "RawInput",
]
