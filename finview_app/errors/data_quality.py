"""
Data quality error classifications for index snapshot processing.

These exceptions help categorize problems found while reading the bundled
CSV snapshots of historical index prices.
"""

from typing import Any, Optional


class DataQualityError(Exception):
    """Base class for data quality issues in snapshot input."""

    def __init__(self, message: str, context: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = True


class MissingDataError(DataQualityError):
    """Required snapshot data is completely missing."""

    def __init__(self, message: str, data_type: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.data_type = data_type


class MalformedDataError(DataQualityError):
    """Data exists but is in incorrect format."""

    def __init__(self, message: str, raw_data: Optional[str] = None,
                 line_number: Optional[int] = None,
                 expected_format: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.raw_data = raw_data
        self.line_number = line_number
        self.expected_format = expected_format
