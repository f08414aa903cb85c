"""
Error classification for index data loading and series generation.

Data quality errors describe bad snapshot input and carry enough context
to locate the problem. Configuration errors describe parameter sets that
cannot produce a valid dataset and are raised before any work is done.
"""

from .data_quality import (
    DataQualityError,
    MalformedDataError,
    MissingDataError,
)
from .system_failures import (
    ConfigurationError,
    GeneratorConfigError,
)

__all__ = [
    # Data Quality Errors
    "DataQualityError",
    "MalformedDataError",
    "MissingDataError",
    # Configuration Failures
    "ConfigurationError",
    "GeneratorConfigError",
]
