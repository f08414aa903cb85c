"""Pytest configuration and shared fixtures."""

from dataclasses import replace
from datetime import date

import pytest

from finview_app.config.defaults import GeneratorParams, IndexParams


@pytest.fixture
def sample_csv() -> str:
    """Snapshot text spanning a year boundary."""
    return (
        "date,value\n"
        "2023-12-29,100.0\n"
        "2024-01-02,110.5\n"
        "2024-06-03,120.25\n"
        "2025-01-02,130.0\n"
    )


@pytest.fixture
def quiet_params() -> GeneratorParams:
    """Generator parameters with no noise and no events."""
    return GeneratorParams(
        indices={
            "SP500": IndexParams(starting_value=4200.0, noise_amplitude=0.0),
            "DOW": IndexParams(starting_value=33000.0, growth_scale=0.95,
                               noise_amplitude=0.0, event_scale=0.9),
        },
        events=(),
    )


@pytest.fixture
def quiet_params_factory(quiet_params):
    """Build noise-free parameters with selected fields replaced."""
    def _factory(**changes) -> GeneratorParams:
        return replace(quiet_params, **changes)
    return _factory


@pytest.fixture
def first_week_2024() -> tuple[date, date]:
    """Monday 2024-01-01 through Sunday 2024-01-07."""
    return date(2024, 1, 1), date(2024, 1, 7)
