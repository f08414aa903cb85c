"""
Historical index store backed by the bundled CSV snapshots.

Snapshots are stored in USD and read once. Per-year views are filtered
by date prefix and converted to EUR.
"""

from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Optional, Union

import structlog

from ..config.defaults import CurrencyParams, DefaultConfig, SnapshotParams, get_default_config
from .currency import convert_to_eur
from .models import DailyPoint, HistoricalYear, Series, freeze_series
from .parsers import parse_csv_file

logger = structlog.get_logger(__name__)

SNAPSHOT_DIR = Path(__file__).parent / "snapshots"


def filter_by_year(series: Iterable[DailyPoint], year: Union[int, str]) -> Series:
    """Keep the points whose ISO date starts with the given year."""
    prefix = f"{year}-"
    return tuple(point for point in series if point.date.startswith(prefix))


class HistoricalDataStore:
    """Raw USD snapshot series per index, with EUR views per calendar year."""

    def __init__(self, series: Mapping[str, Iterable[DailyPoint]],
                 currency: Optional[CurrencyParams] = None):
        self._series = freeze_series(series)
        self.currency = currency or CurrencyParams()

    @classmethod
    def load(cls, config: Optional[DefaultConfig] = None,
             snapshot_dir: Optional[Path] = None) -> "HistoricalDataStore":
        """
        Read every configured snapshot file.

        Args:
            config: Application configuration, defaults if omitted
            snapshot_dir: Directory holding the CSV files, bundled data if omitted

        Raises:
            MissingDataError: If a configured file is absent
            MalformedDataError: If a file contains an unparseable line
        """
        config = config or get_default_config()
        snapshot_dir = Path(snapshot_dir) if snapshot_dir is not None else SNAPSHOT_DIR

        series = load_snapshots(config.snapshots, snapshot_dir)
        logger.info("Loaded index snapshots",
                    snapshot_dir=str(snapshot_dir),
                    rows={name: len(points) for name, points in series.items()})

        return cls(series, currency=config.currency)

    @property
    def index_names(self) -> tuple[str, ...]:
        return tuple(self._series)

    def raw(self, index_name: str) -> Series:
        """Full USD series for one index as read from the snapshot."""
        return self._series[index_name]

    def for_year(self, year: Union[int, str]) -> HistoricalYear:
        """EUR series for every index restricted to one calendar year."""
        return HistoricalYear(
            year=int(year),
            series={
                name: convert_to_eur(filter_by_year(points, year), self.currency)
                for name, points in self._series.items()
            },
        )


def load_snapshots(params: SnapshotParams, snapshot_dir: Path) -> dict[str, Series]:
    """Parse each configured snapshot file keyed by index name."""
    return {
        name: parse_csv_file(snapshot_dir / filename)
        for name, filename in params.files.items()
    }
