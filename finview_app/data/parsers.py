"""
Parsers for the bundled two-column index snapshots.

Snapshot files are plain ``date,value`` CSV with a single header row.
There is no quoting or escaping; anything beyond that shape is rejected.
"""

import math
from datetime import date
from pathlib import Path
from typing import Optional, Union

import structlog

from ..errors import MalformedDataError, MissingDataError
from .models import DailyPoint, Series

logger = structlog.get_logger(__name__)

EXPECTED_FORMAT = "YYYY-MM-DD,<number>"


def parse_csv_line(line: str, line_number: int) -> DailyPoint:
    """
    Parse one ``date,value`` data line.

    Args:
        line: Raw line without the trailing newline
        line_number: 1-based position in the file, for error reporting

    Returns:
        DailyPoint with the normalized ISO date

    Raises:
        MalformedDataError: If the line does not have exactly two usable fields
    """
    fields = line.strip().split(",")
    if len(fields) != 2:
        raise MalformedDataError(
            f"Line {line_number}: expected 2 fields, got {len(fields)}",
            raw_data=line, line_number=line_number, expected_format=EXPECTED_FORMAT,
        )

    date_str, value_str = (f.strip() for f in fields)

    try:
        parsed_date = date.fromisoformat(date_str)
    except ValueError as e:
        raise MalformedDataError(
            f"Line {line_number}: invalid date {date_str!r}",
            raw_data=line, line_number=line_number, expected_format=EXPECTED_FORMAT,
        ) from e

    try:
        value = float(value_str)
    except ValueError as e:
        raise MalformedDataError(
            f"Line {line_number}: invalid value {value_str!r}",
            raw_data=line, line_number=line_number, expected_format=EXPECTED_FORMAT,
        ) from e

    if not math.isfinite(value):
        raise MalformedDataError(
            f"Line {line_number}: value must be finite, got {value_str!r}",
            raw_data=line, line_number=line_number, expected_format=EXPECTED_FORMAT,
        )

    return DailyPoint(date=parsed_date.isoformat(), value=value)


def parse_csv_data(csv_content: str) -> Series:
    """
    Parse snapshot CSV text into a series.

    The text is trimmed, split into lines and the first line is skipped as
    the header. Rows keep their file order.

    Args:
        csv_content: Full CSV text including the header row

    Returns:
        Tuple of DailyPoint in file order

    Raises:
        MalformedDataError: On the first line that cannot be parsed
    """
    lines = csv_content.strip().split("\n")
    # First line is the header
    return tuple(
        parse_csv_line(line, line_number)
        for line_number, line in enumerate(lines[1:], start=2)
    )


def parse_csv_file(path: Union[str, Path], encoding: Optional[str] = "utf-8") -> Series:
    """
    Read and parse a snapshot file.

    Raises:
        MissingDataError: If the file does not exist
        MalformedDataError: If a data line cannot be parsed
    """
    path = Path(path)
    if not path.is_file():
        raise MissingDataError(f"Snapshot file not found: {path}", data_type="snapshot",
                               context={"path": str(path)})

    try:
        series = parse_csv_data(path.read_text(encoding=encoding))
    except MalformedDataError as e:
        e.context.setdefault("path", str(path))
        logger.warning("Malformed snapshot line", path=str(path),
                       line_number=e.line_number, raw_data=e.raw_data)
        raise

    logger.debug("Parsed snapshot file", path=str(path), rows=len(series))
    return series
