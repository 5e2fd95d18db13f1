"""Aggregation of adjusted properties into market and portfolio views."""

from .market_trend import (
    QuarterStats,
    get_quarter_stats,
    get_market_trend,
    get_property_price_trend
)
from .portfolio import (
    PortfolioSummary,
    classify_market_risk,
    get_portfolio_summary
)

__all__ = [
    "QuarterStats",
    "get_quarter_stats",
    "get_market_trend",
    "get_property_price_trend",
    "PortfolioSummary",
    "classify_market_risk",
    "get_portfolio_summary"
]
