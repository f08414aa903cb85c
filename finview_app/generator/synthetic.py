"""
Synthetic daily index series with scheduled event shocks.

Produces one trailing year of mock trading-day values per index using a
multiplicative random walk, then summarizes the stored values into twelve
calendar-month averages.
"""

import math
from dataclasses import asdict
from datetime import date
from typing import Optional

import numpy as np

from ..config.defaults import GeneratorParams
from ..config.validation import ConfigValidator, ValidationError
from ..data.models import DailyPoint, IndexHistory, MonthlyAverage
from ..errors import GeneratorConfigError
from ..logging.config import get_generator_logger, log_generation_summary
from ..utils.calendar import MONTH_LABELS, iter_trading_days, trailing_year_window

logger = get_generator_logger(__name__)


def round_price(value: float) -> float:
    """Round half up to cents; generated values are always positive."""
    return math.floor(value * 100 + 0.5) / 100


def build_monthly_averages(
    sums: list[dict[str, float]],
    counts: list[int],
    index_names: tuple[str, ...],
) -> tuple[MonthlyAverage, ...]:
    """
    Turn per-month running sums into twelve averages in calendar order.

    A month without captured trading days averages to 0.0 for every index.
    """
    averages = []
    for month, label in enumerate(MONTH_LABELS):
        count = counts[month]
        averages.append(MonthlyAverage(
            month=label,
            averages={
                name: sums[month][name] / count if count > 0 else 0.0
                for name in index_names
            },
            trading_days=count,
        ))
    return tuple(averages)


class SeriesGenerator:
    """
    Random-walk generator for the tracked indices.

    Each trading day every index moves by its daily growth, a uniform noise
    term of the configured width and, in event months, a share of the event
    impact scaled per index. The random source is drawn in a fixed order
    (day by day, indices in configuration order), so a seeded generator is
    reproducible.
    """

    def __init__(self, params: Optional[GeneratorParams] = None,
                 rng: Optional[np.random.Generator] = None,
                 seed: Optional[int] = None):
        self.params = params or GeneratorParams()

        errors = ConfigValidator.validate_generator_params(asdict(self.params))
        if errors:
            raise GeneratorConfigError(
                "Invalid generator parameters: "
                + "; ".join(f"{e.field}: {e.message}" for e in errors),
                errors=errors,
            )

        if rng is not None and seed is not None:
            raise GeneratorConfigError(
                "Pass either a random generator or a seed, not both",
                errors=[ValidationError(field="seed", message="Conflicts with rng", value=seed)],
            )

        self.seeded = rng is not None or seed is not None
        self.rng = rng if rng is not None else np.random.default_rng(seed)
        self._event_impacts = {event.month: event.impact for event in self.params.events}

    @property
    def index_names(self) -> tuple[str, ...]:
        return tuple(self.params.indices)

    def event_impact(self, day: date) -> float:
        """Per-trading-day share of the event scheduled for the day's month."""
        impact = self._event_impacts.get(day.month - 1)
        if impact is None:
            return 0.0
        return impact / self.params.event_spread_days

    def generate(self, start: Optional[date] = None, end: Optional[date] = None,
                 today: Optional[date] = None) -> IndexHistory:
        """
        Generate daily series and monthly averages for an inclusive window.

        Args:
            start: First calendar day, one year before ``today`` if omitted
            end: Last calendar day, ``today`` if omitted
            today: Reference day for the default window, the current date if omitted

        Returns:
            IndexHistory with one point per trading day per index

        Raises:
            GeneratorConfigError: If the window ends before it starts
        """
        default_start, default_end = trailing_year_window(today)
        start = start if start is not None else default_start
        end = end if end is not None else default_end

        if end < start:
            raise GeneratorConfigError(
                f"Window end {end} is before start {start}",
                errors=[ValidationError(field="end", message="Must not precede start", value=end)],
            )

        index_params = self.params.indices
        names = self.index_names
        growth = {name: self.params.daily_growth(name) for name in names}
        values = {name: float(index_params[name].starting_value) for name in names}
        series: dict[str, list[DailyPoint]] = {name: [] for name in names}

        sums = [{name: 0.0 for name in names} for _ in MONTH_LABELS]
        counts = [0] * len(MONTH_LABELS)

        for day in iter_trading_days(start, end):
            event_impact = self.event_impact(day)
            month = day.month - 1
            iso_date = day.isoformat()

            for name in names:
                half_width = index_params[name].noise_amplitude / 2
                noise = float(self.rng.uniform(-half_width, half_width))
                daily_return = growth[name] + noise + event_impact * index_params[name].event_scale

                values[name] *= 1 + daily_return
                stored = round_price(values[name])
                if stored <= 0:
                    raise GeneratorConfigError(
                        f"{name} decayed below one cent on {iso_date}",
                        errors=[ValidationError(field=f"indices.{name}",
                                                message="Stored value rounded to zero",
                                                value=values[name])],
                    )

                series[name].append(DailyPoint(date=iso_date, value=stored))
                sums[month][name] += stored

            counts[month] += 1

        history = IndexHistory(
            series=series,
            monthly_averages=build_monthly_averages(sums, counts, names),
        )

        log_generation_summary(
            logger,
            start=start,
            end=end,
            trading_days=sum(counts),
            final_values={name: points[-1].value for name, points in series.items() if points},
            seeded=self.seeded,
        )

        return history


def generate(params: Optional[GeneratorParams] = None, *,
             start: Optional[date] = None,
             end: Optional[date] = None,
             today: Optional[date] = None,
             rng: Optional[np.random.Generator] = None,
             seed: Optional[int] = None) -> IndexHistory:
    """Generate the mock current-year dataset with default or given parameters."""
    return SeriesGenerator(params, rng=rng, seed=seed).generate(start=start, end=end, today=today)
