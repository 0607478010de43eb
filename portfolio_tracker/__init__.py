"""
Portfolio Tracker

Financial analytics for real estate investment portfolios.
"""

__version__ = "0.1.0"
