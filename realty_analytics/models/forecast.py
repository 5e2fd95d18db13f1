"""Trend-line price forecast with widening confidence bounds."""

from dataclasses import dataclass, asdict
from typing import List, Optional, Sequence
import logging

import numpy as np
import pandas as pd
from scipy import stats

from ..config import constants
from ..data.quarters import QUARTERS, shift_quarter
from ..utils.numeric import round_half_up
from .adjustment import quarterly_average_prices
from .jitter import JitterGenerator

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ForecastPoint:
    """One point of a price forecast."""

    quarter: str
    predicted_price: float
    lower_bound: float
    upper_bound: float
    is_forecast: bool

    @property
    def interval_width(self) -> float:
        return self.upper_bound - self.lower_bound

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class TrendFit:
    """Ordinary least-squares fit of price against quarter index."""

    slope: float
    intercept: float
    r_squared: float
    residual_std: float  # Population std of residuals around the line
    n_observations: int

    def predict(self, index: float) -> float:
        return self.slope * index + self.intercept


def fit_trend(prices: Sequence[float]) -> Optional[TrendFit]:
    """
    Fit ``price = slope * i + intercept`` over ``i = 0..n-1``.

    Returns None when fewer than two prices are given, since the slope is
    undefined.
    """
    y = np.asarray(prices, dtype=float)
    n = len(y)
    if n < 2:
        return None

    x = np.arange(n, dtype=float)
    result = stats.linregress(x, y)

    residuals = y - (result.slope * x + result.intercept)
    residual_std = float(np.sqrt(np.mean(residuals ** 2)))

    return TrendFit(
        slope=float(result.slope),
        intercept=float(result.intercept),
        r_squared=float(result.rvalue ** 2),
        residual_std=residual_std,
        n_observations=n
    )


def project_prices(
    last_price: float,
    residual_std: float,
    start_quarter: str,
    quarters_ahead: int
) -> List[ForecastPoint]:
    """
    Project ``quarters_ahead`` points after ``start_quarter``.

    Step ``i`` (0-based) predicts ``last_price * (1 + i * 0.005)`` rather than
    following the fitted slope, and its 95% band half-width is
    ``1.96 * residual_std * (1 + i * 0.3)``.
    """
    if quarters_ahead < 0:
        raise ValueError("quarters_ahead cannot be negative")

    points = []
    for i in range(quarters_ahead):
        predicted = last_price * (1 + i * constants.FORECAST_GROWTH_STEP)
        uncertainty = residual_std * (1 + i * constants.CONFIDENCE_WIDENING)
        half_width = uncertainty * constants.CONFIDENCE_Z_SCORE

        # Rounding the half-width alone keeps the band width monotone in i
        predicted = round_half_up(predicted)
        half_width = round_half_up(half_width)
        points.append(ForecastPoint(
            quarter=shift_quarter(start_quarter, i + 1),
            predicted_price=predicted,
            lower_bound=predicted - half_width,
            upper_bound=predicted + half_width,
            is_forecast=True
        ))
    return points


def forecast_from_history(history: pd.Series, quarters_ahead: int) -> List[ForecastPoint]:
    """
    Build a forecast from an average-price series indexed by quarter.

    Parameters
    ----------
    history : pd.Series
        Average adjusted price per historical quarter, in chronological order
    quarters_ahead : int
        Number of quarters to project past the last historical quarter

    Returns
    -------
    list of ForecastPoint
        Historical prefix (``is_forecast=False``) then projected suffix.
        Empty when ``history`` is empty; history only when a trend cannot
        be fitted.
    """
    if quarters_ahead < 0:
        raise ValueError("quarters_ahead cannot be negative")

    history = history.dropna()
    if history.empty:
        return []

    result = [
        ForecastPoint(
            quarter=quarter,
            predicted_price=float(price),
            lower_bound=float(price),
            upper_bound=float(price),
            is_forecast=False
        )
        for quarter, price in history.items()
    ]

    trend = fit_trend(history.to_numpy())
    if trend is None:
        logger.warning("Not enough history to fit a trend; returning history only")
        return result

    logger.debug(
        f"Trend over {trend.n_observations} quarters: slope={trend.slope:.3f}, "
        f"R²={trend.r_squared:.4f}, residual std={trend.residual_std:.3f}"
    )

    result.extend(project_prices(
        last_price=float(history.iloc[-1]),
        residual_std=trend.residual_std,
        start_quarter=history.index[-1],
        quarters_ahead=quarters_ahead
    ))
    return result


def generate_forecast(
    properties: pd.DataFrame,
    quarters_ahead: int = constants.DEFAULT_QUARTERS_AHEAD,
    anchor_quarter: str = constants.ANCHOR_QUARTER,
    quarters: Sequence[str] = QUARTERS,
    jitter: Optional[JitterGenerator] = None,
    strict: bool = False
) -> List[ForecastPoint]:
    """
    Forecast the market-average adjusted price past ``anchor_quarter``.

    History covers the known quarters up to and including the anchor. An
    anchor outside ``quarters`` yields an empty forecast.
    """
    if quarters_ahead < 0:
        raise ValueError("quarters_ahead cannot be negative")

    quarters = list(quarters)
    if anchor_quarter not in quarters:
        logger.warning(f"Anchor quarter {anchor_quarter} is not on the quarter axis")
        return []

    historical_quarters = quarters[:quarters.index(anchor_quarter) + 1]
    history = quarterly_average_prices(properties, historical_quarters, jitter=jitter, strict=strict)

    points = forecast_from_history(history, quarters_ahead)
    logger.info(
        f"Generated forecast: {sum(not p.is_forecast for p in points)} historical, "
        f"{sum(p.is_forecast for p in points)} projected quarters"
    )
    return points


def forecast_to_frame(points: Sequence[ForecastPoint]) -> pd.DataFrame:
    """Forecast points as a DataFrame."""
    columns = ["quarter", "predicted_price", "lower_bound", "upper_bound", "is_forecast"]
    return pd.DataFrame([p.to_dict() for p in points], columns=columns)
