"""Analytics models: adjustment, scoring, forecast, correlation, stress, cycle."""

from .jitter import JitterGenerator
from .adjustment import (
    base_price_multiplier,
    location_multiplier,
    age_multiplier,
    get_properties_for_quarter,
    quarterly_average_prices
)
from .scoring import (
    PropertyScore,
    calculate_property_score,
    score_properties,
    get_all_property_scores,
    scores_to_frame,
    rank_scores
)
from .forecast import (
    ForecastPoint,
    TrendFit,
    fit_trend,
    forecast_from_history,
    generate_forecast,
    forecast_to_frame
)
from .correlation import (
    CorrelationResult,
    pearson_correlation,
    calculate_correlations,
    correlations_to_frame
)
from .stress_test import StressScenario, calculate_stress_scenario
from .market_cycle import MarketPhase, MarketCyclePhase, determine_market_cycle

__all__ = [
    "JitterGenerator",
    "base_price_multiplier",
    "location_multiplier",
    "age_multiplier",
    "get_properties_for_quarter",
    "quarterly_average_prices",
    "PropertyScore",
    "calculate_property_score",
    "score_properties",
    "get_all_property_scores",
    "scores_to_frame",
    "rank_scores",
    "ForecastPoint",
    "TrendFit",
    "fit_trend",
    "forecast_from_history",
    "generate_forecast",
    "forecast_to_frame",
    "CorrelationResult",
    "pearson_correlation",
    "calculate_correlations",
    "correlations_to_frame",
    "StressScenario",
    "calculate_stress_scenario",
    "MarketPhase",
    "MarketCyclePhase",
    "determine_market_cycle"
]
