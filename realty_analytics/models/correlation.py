"""Correlation between market prices and economic indicators."""

from dataclasses import dataclass
from typing import List, Optional, Sequence
import logging

import numpy as np
import pandas as pd

from ..config import constants
from ..data.economic import EconomicTable
from ..data.quarters import QUARTERS
from ..utils.numeric import round_half_up
from .adjustment import quarterly_average_prices
from .jitter import JitterGenerator

logger = logging.getLogger(__name__)

@dataclass(frozen=True)
class CorrelationResult:
    """Pearson coefficient between two named series."""

    x: str
    y: str
    value: float


def pearson_correlation(x: Sequence[float], y: Sequence[float]) -> float:
    """
    Pearson correlation coefficient, rounded to two decimals.

    Sums are taken over mean-centred values, so a large common offset does
    not cancel away the spread. Empty input or a constant series gives 0.0.

    Raises
    ------
    ValueError
        If the sequences differ in length
    """
    x = np.asarray(x, dtype=float)
    y = np.asarray(y, dtype=float)
    if x.shape != y.shape:
        raise ValueError(f"Series lengths differ: {len(x)} vs {len(y)}")

    if len(x) == 0 or np.ptp(x) == 0 or np.ptp(y) == 0:
        return 0.0

    dx = x - x.mean()
    dy = y - y.mean()
    numerator = (dx * dy).sum()
    denominator = np.sqrt((dx * dx).sum() * (dy * dy).sum())
    if denominator == 0 or not np.isfinite(denominator):
        return 0.0

    r = float(np.clip(numerator / denominator, -1.0, 1.0))
    return round_half_up(r, 2)


def calculate_correlations(
    properties: pd.DataFrame,
    economic_table: EconomicTable,
    quarters: Optional[Sequence[str]] = None,
    jitter: Optional[JitterGenerator] = None,
    strict: bool = False
) -> List[CorrelationResult]:
    """
    Correlate the quarterly average adjusted price with each indicator.

    Parameters
    ----------
    properties : pd.DataFrame
        Static property records
    economic_table : EconomicTable
        Quarterly indicators; missing quarters count as 0
    quarters : sequence of str, optional
        Quarters to align on (defaults to the known quarter axis)
    jitter : JitterGenerator, optional
        Jitter source for the quarter adjustment
    strict : bool, default False
        Raise on quarters without a base multiplier instead of using 1.0

    Returns
    -------
    list of CorrelationResult
        One entry per indicator in ``CORRELATION_INDICATORS``
    """
    quarters = list(QUARTERS if quarters is None else quarters)
    prices = quarterly_average_prices(properties, quarters, jitter=jitter, strict=strict).fillna(0.0)

    results = []
    for field, display_name in constants.CORRELATION_INDICATORS.items():
        indicator = economic_table.series(field, quarters, fill_value=0.0)
        value = pearson_correlation(prices.to_numpy(), indicator.to_numpy())
        results.append(CorrelationResult(x=constants.PRICE_SERIES_LABEL, y=display_name, value=value))

    logger.info(f"Calculated {len(results)} price/indicator correlations over {len(quarters)} quarters")
    return results


def correlations_to_frame(results: Sequence[CorrelationResult]) -> pd.DataFrame:
    """Correlation results as a DataFrame."""
    return pd.DataFrame(
        [(r.x, r.y, r.value) for r in results],
        columns=["x", "y", "value"]
    )
