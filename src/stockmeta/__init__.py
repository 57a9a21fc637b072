"""stockmeta - Title and keyword formatting for stock-media submissions."""
from stockmeta.core.counter import count_input
from stockmeta.core.csv_encoder import CsvEncoder, encode_csv, write_csv
from stockmeta.core.formatter import MetadataFormatter, format_metadata
from stockmeta.models.config import FormatConfig
from stockmeta.models.result import (
    CsvRow,
    FormattedResult,
    InputCounts,
    RawInput,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "format_metadata",
    "encode_csv",
    "write_csv",
    "count_input",
    "MetadataFormatter",
    "CsvEncoder",
    "FormatConfig",
    "RawInput",
    "FormattedResult",
    "CsvRow",
    "InputCounts",
]
