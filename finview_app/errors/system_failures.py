"""
Configuration failure classifications.

These exceptions represent parameter sets that would produce degenerate
output. They are not recoverable: the caller has to fix the configuration.
"""

from typing import TYPE_CHECKING, Any, Optional

if TYPE_CHECKING:
    from ..config.validation import ValidationError


class ConfigurationError(Exception):
    """Base class for invalid configuration."""

    def __init__(self, message: str, context: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = False


class GeneratorConfigError(ConfigurationError):
    """Synthetic series parameters failed validation."""

    def __init__(self, message: str,
                 errors: Optional[list["ValidationError"]] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.errors = errors or []

    @property
    def fields(self) -> list[str]:
        """Names of the fields that failed validation."""
        return [error.field for error in self.errors]
