"""Configuration defaults, loading and validation."""

from .defaults import (
    CurrencyParams,
    DefaultConfig,
    EventShock,
    GeneratorParams,
    IndexParams,
    SnapshotParams,
    get_default_config,
)
from .loader import ConfigLoader, build_config
from .validation import ConfigValidator, ValidationError

__all__ = [
    "ConfigLoader",
    "ConfigValidator",
    "CurrencyParams",
    "DefaultConfig",
    "EventShock",
    "GeneratorParams",
    "IndexParams",
    "SnapshotParams",
    "ValidationError",
    "build_config",
    "get_default_config",
]
