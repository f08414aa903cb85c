"""Tests for structlog configuration and generation summaries."""

from datetime import date

import pytest
import structlog
from structlog.testing import capture_logs

from finview_app.logging.config import (
    configure_logging, get_generator_logger, log_generation_summary
)


@pytest.fixture
def reset_structlog():
    yield
    structlog.reset_defaults()


class TestConfigureLogging:
    """Test processor chain selection."""

    def test_json_renderer(self, reset_structlog):
        configure_logging(level="DEBUG", format_json=True)
        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)

    def test_console_renderer_with_caller(self, reset_structlog):
        configure_logging(level="INFO", include_caller=True)
        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)
        assert any(isinstance(p, structlog.processors.CallsiteParameterAdder) for p in processors)

    def test_invalid_level(self, reset_structlog):
        with pytest.raises(AttributeError):
            configure_logging(level="LOUD")


class TestGenerationSummary:
    """Test structured generation summary events."""

    def test_summary_fields(self):
        with capture_logs() as logs:
            logger = get_generator_logger("tests.summary")
            log_generation_summary(
                logger,
                start=date(2024, 1, 1),
                end=date(2024, 1, 7),
                trading_days=5,
                final_values={"SP500": 4203.61},
                seeded=True,
            )

        assert len(logs) == 1
        entry = logs[0]
        assert entry["event"] == "Synthetic series generated"
        assert entry["subsystem"] == "generator"
        assert entry["window_start"] == "2024-01-01"
        assert entry["trading_days"] == 5
        assert entry["seeded"] is True

    def test_summary_context(self):
        with capture_logs() as logs:
            logger = get_generator_logger("tests.summary")
            log_generation_summary(
                logger,
                start=date(2024, 1, 1),
                end=date(2024, 1, 1),
                trading_days=1,
                final_values={},
                seeded=False,
                context={"source": "test"},
            )

        assert logs[0]["context"] == {"source": "test"}
