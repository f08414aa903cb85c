"""Synthetic index series generation"""

from .synthetic import SeriesGenerator, build_monthly_averages, generate, round_price

__all__ = [
    "SeriesGenerator",
    "build_monthly_averages",
    "generate",
    "round_price",
]
