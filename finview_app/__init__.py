"""
FinView Data - Index data stores for a personal-finance dashboard

Parses bundled CSV snapshots of stock-index prices, converts them to EUR,
and generates a synthetic "current year" dataset with scheduled market
events and monthly averages.
"""

__version__ = "0.1.0"
__author__ = "FinView Team"
