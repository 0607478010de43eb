"""
Financial Calculation Engine

Core calculation modules for real estate portfolio analysis.
All functions are pure: they read the records they are given and return
fresh results. Anything that depends on the current date takes `today`.
"""

from portfolio_tracker.calculations import (
    cashflow,
    frequency,
    metrics,
    mortgage,
    reports,
)

__all__ = ["cashflow", "frequency", "metrics", "mortgage", "reports"]
