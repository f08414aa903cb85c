"""
Canonical data models for index price series.

This module defines immutable data structures shared by the snapshot
stores and the synthetic generator. Once built, a dataset can be handed
to any number of readers without copying.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from ..config.defaults import EventShock

__all__ = [
    "DailyPoint",
    "EventShock",
    "HistoricalYear",
    "IndexHistory",
    "MonthlyAverage",
    "Series",
    "freeze_series",
]


@dataclass(frozen=True)
class DailyPoint:
    """One sample per trading day per index."""
    date: str          # ISO calendar date, YYYY-MM-DD
    value: float       # Price level

    def to_dict(self) -> dict[str, Any]:
        return {"date": self.date, "value": self.value}


Series = tuple[DailyPoint, ...]


def freeze_series(series: Mapping[str, Iterable[DailyPoint]]) -> Mapping[str, Series]:
    """Read-only mapping of index name to tuple series, keeping key order."""
    return MappingProxyType({name: tuple(points) for name, points in series.items()})


@dataclass(frozen=True)
class MonthlyAverage:
    """Mean of each index's daily values within one calendar month."""
    month: str                                   # Short label, e.g. "Jan"
    averages: Mapping[str, float]                # Index name -> mean value
    trading_days: int = 0                        # Trading days captured in the month

    def __post_init__(self) -> None:
        object.__setattr__(self, "averages", MappingProxyType(dict(self.averages)))

    def __getitem__(self, index_name: str) -> float:
        return self.averages[index_name]

    def to_dict(self) -> dict[str, Any]:
        return {"month": self.month, **self.averages}


@dataclass(frozen=True)
class IndexHistory:
    """Generated daily series per index plus the monthly summary."""
    series: Mapping[str, Series]
    monthly_averages: tuple[MonthlyAverage, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "series", freeze_series(self.series))
        object.__setattr__(self, "monthly_averages", tuple(self.monthly_averages))

    def __getitem__(self, index_name: str) -> Series:
        return self.series[index_name]

    @property
    def index_names(self) -> tuple[str, ...]:
        return tuple(self.series)

    def to_dict(self) -> dict[str, Any]:
        """Plain structure in the shape the dashboard consumes."""
        result: dict[str, Any] = {
            name: [point.to_dict() for point in points]
            for name, points in self.series.items()
        }
        result["monthlyAverages"] = [entry.to_dict() for entry in self.monthly_averages]
        return result


@dataclass(frozen=True)
class HistoricalYear:
    """One calendar year of snapshot data per index."""
    year: int
    series: Mapping[str, Series]
    currency: str = "EUR"

    def __post_init__(self) -> None:
        object.__setattr__(self, "series", freeze_series(self.series))

    def __getitem__(self, index_name: str) -> Series:
        return self.series[index_name]

    @property
    def index_names(self) -> tuple[str, ...]:
        return tuple(self.series)

    def to_dict(self) -> dict[str, Any]:
        return {
            name: [point.to_dict() for point in points]
            for name, points in self.series.items()
        }
