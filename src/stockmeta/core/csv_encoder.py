"""CSV export of formatted metadata."""
from __future__ import annotations

import csv
import io
from pathlib import Path

from stockmeta.models.result import CsvRow, FormattedResult
from stockmeta.utils.logging import get_logger

logger = get_logger("csv")

CSV_HEADERS = ["Filename", "Title", "Keywords", "Category"]
DEFAULT_FILENAME = "Image_01.jpg"
DEFAULT_CSV_NAME = "metadata.csv"


class CsvEncoder:
    """Encode a formatted result as a header row plus one data row."""

    @staticmethod
    def encode_row(row: CsvRow) -> str:
        """Encode a row.

        The header is written bare. Every data field is quoted with embedded
        quotes doubled. Lines are joined by a single newline and the text has
        no trailing newline.
        """
        buffer = io.StringIO(newline="")
        csv.writer(buffer, lineterminator="\n").writerow(CSV_HEADERS)
        csv.writer(
            buffer,
            quoting=csv.QUOTE_ALL,
            lineterminator="\n",
        ).writerow(row.values())
        return buffer.getvalue().removesuffix("\n")

    @classmethod
    def encode(
        cls,
        result: FormattedResult,
        category: str,
        filename: str = DEFAULT_FILENAME,
    ) -> str:
        return cls.encode_row(CsvRow.from_result(result, category, filename))


def encode_csv(
    result: FormattedResult,
    category: str,
    filename: str = DEFAULT_FILENAME,
) -> str:
    """Encode a formatted result as CSV text."""
    return CsvEncoder.encode(result, category, filename)


def write_csv(
    result: FormattedResult,
    category: str,
    filename: str = DEFAULT_FILENAME,
    path: str | Path = DEFAULT_CSV_NAME,
) -> Path:
    """Write the encoded CSV to ``path`` as UTF-8 and return the path."""
    path = Path(path)
    path.write_text(encode_csv(result, category, filename), encoding="utf-8")
    logger.info("Wrote metadata CSV to %s", path)
    return path
