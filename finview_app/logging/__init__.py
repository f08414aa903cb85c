"""
Logging configuration and utilities for the FinView data stores.
"""
from .config import configure_logging, get_generator_logger, get_logger

__all__ = ["configure_logging", "get_logger", "get_generator_logger"]
