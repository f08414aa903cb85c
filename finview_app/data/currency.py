"""Currency conversion for index series."""

import math
from collections.abc import Iterable
from typing import Optional

from ..config.defaults import CurrencyParams
from ..errors import ConfigurationError
from .models import DailyPoint, Series


def convert_series(series: Iterable[DailyPoint], rate: float) -> Series:
    """
    Multiply every value by a fixed exchange rate.

    Values are not rounded; dates are kept as-is.

    Raises:
        ConfigurationError: If the rate is not a positive finite number
    """
    if not math.isfinite(rate) or rate <= 0:
        raise ConfigurationError(f"Exchange rate must be positive, got {rate}",
                                 context={"rate": rate})

    return tuple(DailyPoint(date=point.date, value=point.value * rate) for point in series)


def convert_to_eur(series: Iterable[DailyPoint], params: Optional[CurrencyParams] = None) -> Series:
    """Convert a USD series to EUR using the configured rate."""
    params = params or CurrencyParams()
    return convert_series(series, params.usd_to_eur)
