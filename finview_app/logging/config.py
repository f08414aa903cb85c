"""
Centralized logging configuration for the FinView data stores.

This module provides standardized logging configuration using structlog
for all components. Generation runs and snapshot loads emit structured
events so a dataset can be traced back to its window and parameters.
"""
import logging
import sys
from datetime import date
from typing import Any, Optional

import structlog
from structlog.types import FilteringBoundLogger


def configure_logging(
    level: str = "INFO",
    format_json: bool = False,
    include_timestamp: bool = True,
    include_caller: bool = False,
    extra_processors: Optional[list] = None
) -> None:
    """
    Configure structlog for the entire application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_json: If True, output JSON format; otherwise human-readable
        include_timestamp: Include timestamp in log output
        include_caller: Include caller information (filename, line number)
        extra_processors: Additional structlog processors to include
    """
    # Convert string level to logging constant
    log_level = getattr(logging, level.upper())

    # Route structlog output through standard library logging
    logging.basicConfig(
        level=log_level,
        stream=sys.stdout,
        format="%(message)s"  # structlog will handle formatting
    )

    # Build processor chain
    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    # Add timestamp if requested
    if include_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso"))

    # Add caller information if requested
    if include_caller:
        processors.append(structlog.processors.CallsiteParameterAdder(
            parameters=[structlog.processors.CallsiteParameter.FILENAME,
                       structlog.processors.CallsiteParameter.LINENO]
        ))

    # Add any extra processors
    if extra_processors:
        processors.extend(extra_processors)

    # Add final formatting processor
    if format_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))

    # Configure structlog
    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> FilteringBoundLogger:
    """
    Get a configured structlog logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger instance
    """
    return structlog.get_logger(name)


def get_generator_logger(name: str) -> FilteringBoundLogger:
    """
    Get a logger bound to the synthetic series generator subsystem.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger for generation runs
    """
    # Tag every event with the generator subsystem
    return get_logger(name).bind(subsystem="generator")


def log_generation_summary(
    logger: FilteringBoundLogger,
    start: date,
    end: date,
    trading_days: int,
    final_values: dict[str, float],
    seeded: bool,
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log the outcome of one generation run with standardized fields.

    Args:
        logger: Structlog logger instance
        start: First calendar day of the window
        end: Last calendar day of the window
        trading_days: Number of trading days produced per index
        final_values: Last stored value per index
        seeded: Whether the random source was seeded by the caller
        context: Additional context data
    """
    # Use the logger's bind method to keep fields structured
    bound_logger = logger.bind(
        window_start=start.isoformat(),
        window_end=end.isoformat(),
        trading_days=trading_days,
        final_values=final_values,
        seeded=seeded,
    )

    if context:
        bound_logger = bound_logger.bind(context=context)

    bound_logger.info("Synthetic series generated")
