"""
Application data context.

Everything the dashboard reads is computed once into a DataContext and
handed out by reference. A reload builds a new context and swaps it in
whole; an existing context is never modified.
"""

import threading
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from datetime import date
from pathlib import Path
from types import MappingProxyType
from typing import Optional

import numpy as np
import structlog

from ..config.defaults import DefaultConfig, get_default_config
from ..data.history import HistoricalDataStore
from ..data.models import HistoricalYear, IndexHistory
from ..generator.synthetic import SeriesGenerator

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class DataContext:
    """Immutable snapshot of all index data for one application session."""
    mock: IndexHistory
    historical: Mapping[int, HistoricalYear]
    built_for: date

    def __post_init__(self) -> None:
        object.__setattr__(self, "historical", MappingProxyType(dict(self.historical)))

    def historical_year(self, year: int) -> HistoricalYear:
        """Snapshot data for one year, KeyError if it was not loaded."""
        return self.historical[year]


def build_context(config: Optional[DefaultConfig] = None, *,
                  years: Optional[Iterable[int]] = None,
                  today: Optional[date] = None,
                  rng: Optional[np.random.Generator] = None,
                  seed: Optional[int] = None,
                  snapshot_dir: Optional[Path] = None) -> DataContext:
    """
    Compute the full dataset explicitly.

    Args:
        config: Application configuration, defaults if omitted
        years: Historical years to expose, the configured years if omitted
        today: Reference day for the mock window, the current date if omitted
        rng: Random source for the mock series
        seed: Seed for a fresh random source, ignored when rng is given
        snapshot_dir: Alternative directory for the CSV snapshots

    Returns:
        DataContext holding the mock year and the historical years
    """
    config = config or get_default_config()
    today = today or date.today()
    years = tuple(years) if years is not None else config.snapshots.years

    generator = SeriesGenerator(config.generator, rng=rng,
                                seed=seed if rng is None else None)
    mock = generator.generate(today=today)

    store = HistoricalDataStore.load(config, snapshot_dir=snapshot_dir)
    historical = {year: store.for_year(year) for year in years}

    logger.info("Built data context", built_for=today.isoformat(),
                historical_years=list(historical), indices=list(mock.index_names))

    return DataContext(mock=mock, historical=historical, built_for=today)


class DataContextProvider:
    """
    Lazily builds a DataContext on first access and shares it afterwards.

    Consumers receive the provider explicitly rather than importing a
    module-level dataset.
    """

    def __init__(self, config: Optional[DefaultConfig] = None, **build_kwargs):
        self.config = config or get_default_config()
        self._build_kwargs = build_kwargs
        self._context: Optional[DataContext] = None
        self._lock = threading.Lock()

    @property
    def is_built(self) -> bool:
        return self._context is not None

    def get(self) -> DataContext:
        """Return the shared context, building it on first call."""
        with self._lock:
            if self._context is None:
                self._context = build_context(self.config, **self._build_kwargs)
            return self._context

    def reload(self, config: Optional[DefaultConfig] = None) -> DataContext:
        """Build a fresh context and replace the shared one wholesale."""
        with self._lock:
            if config is not None:
                self.config = config
            config = self.config
        context = build_context(config, **self._build_kwargs)
        with self._lock:
            self._context = context
        logger.info("Reloaded data context", built_for=context.built_for.isoformat())
        return context
