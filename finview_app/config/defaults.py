"""Default configuration parameters for the index data stores."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class IndexParams:
    """Random-walk parameters for a single tracked index."""
    starting_value: float                            # Level one year ago
    growth_scale: float = 1.0                        # Multiplier on the primary daily growth
    noise_amplitude: float = 0.005                   # Full width of the uniform daily noise
    event_scale: float = 1.0                         # Multiplier on event shock impact


@dataclass(frozen=True)
class EventShock:
    """Scheduled market event spread across one calendar month."""
    month: int                                       # 0 = January ... 11 = December
    impact: float                                    # Signed fraction for the whole month


@dataclass(frozen=True)
class GeneratorParams:
    """Synthetic series generator parameters."""
    indices: dict[str, IndexParams] = field(default_factory=lambda: {
        "SP500": IndexParams(starting_value=4200.0, growth_scale=1.0,
                             noise_amplitude=0.005, event_scale=1.0),
        "DOW": IndexParams(starting_value=33000.0, growth_scale=0.95,
                           noise_amplitude=0.004, event_scale=0.9),
    })
    target_annual_growth: float = 0.20               # Compounded over a trading year
    trading_days_per_year: int = 252
    event_spread_days: int = 20                      # Trading days an event is spread over
    events: tuple[EventShock, ...] = (
        EventShock(month=2, impact=-0.05),           # Market correction
        EventShock(month=5, impact=0.07),            # Strong earnings season
        EventShock(month=8, impact=-0.03),           # Economic concerns
        EventShock(month=11, impact=0.06),           # Year-end rally
    )

    @property
    def base_daily_growth(self) -> float:
        """Daily growth rate of the primary index."""
        return (1 + self.target_annual_growth) ** (1 / self.trading_days_per_year) - 1

    def daily_growth(self, index_name: str) -> float:
        """Daily growth rate for one index after its growth scale."""
        return self.base_daily_growth * self.indices[index_name].growth_scale


@dataclass(frozen=True)
class CurrencyParams:
    """Currency conversion parameters."""
    usd_to_eur: float = 0.92


@dataclass(frozen=True)
class SnapshotParams:
    """Bundled CSV snapshot parameters."""
    files: dict[str, str] = field(default_factory=lambda: {
        "SP500": "sp500.csv",
        "DOW": "dowjones.csv",
    })
    years: tuple[int, ...] = (2024, 2025)


@dataclass(frozen=True)
class DefaultConfig:
    """Complete default configuration."""
    generator: GeneratorParams
    currency: CurrencyParams
    snapshots: SnapshotParams


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig(
        generator=GeneratorParams(),
        currency=CurrencyParams(),
        snapshots=SnapshotParams(),
    )
