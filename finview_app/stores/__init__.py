"""
Data stores consumed by the dashboard.

Builds the immutable data context that combines the synthetic current
year with the historical snapshot years.
"""
from .context import DataContext, DataContextProvider, build_context

__all__ = ["DataContext", "DataContextProvider", "build_context"]
