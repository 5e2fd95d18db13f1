"""Per-quarter market statistics over the adjusted property set."""

from dataclasses import dataclass, asdict
from typing import List, Optional, Sequence
import logging

import pandas as pd

from ..data.quarters import QUARTERS
from ..models.adjustment import get_properties_for_quarter
from ..models.jitter import JitterGenerator
from ..utils.numeric import round_half_up

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class QuarterStats:
    """Adjusted price distribution for one quarter."""

    quarter: str
    min: float
    max: float
    avg: float
    median: float
    total_properties: int

    def to_dict(self) -> dict:
        return asdict(self)


def get_quarter_stats(
    properties: pd.DataFrame,
    quarter: str,
    jitter: Optional[JitterGenerator] = None,
    strict: bool = False
) -> QuarterStats:
    """
    Min/max/avg/median adjusted price in ``quarter``.

    The median is the upper-middle element for even counts, as on the
    dashboard's quarter summary. An empty property set gives zeros.
    """
    adjusted = get_properties_for_quarter(properties, quarter, jitter=jitter, strict=strict)
    prices = adjusted['adjusted_price_per_unit'].sort_values().reset_index(drop=True)

    if prices.empty:
        return QuarterStats(quarter, 0.0, 0.0, 0.0, 0.0, 0)

    return QuarterStats(
        quarter=quarter,
        min=float(prices.iloc[0]),
        max=float(prices.iloc[-1]),
        avg=float(prices.mean()),
        median=float(prices.iloc[len(prices) // 2]),
        total_properties=len(prices)
    )


def get_market_trend(
    properties: pd.DataFrame,
    quarters: Sequence[str] = QUARTERS,
    jitter: Optional[JitterGenerator] = None,
    strict: bool = False
) -> pd.DataFrame:
    """
    Average and median adjusted price per quarter, rounded to one decimal.

    Returns
    -------
    pd.DataFrame
        Columns ``quarter``, ``avg_price``, ``median_price``
    """
    rows = []
    for quarter in quarters:
        stats = get_quarter_stats(properties, quarter, jitter=jitter, strict=strict)
        rows.append({
            'quarter': quarter,
            'avg_price': round_half_up(stats.avg, 1),
            'median_price': round_half_up(stats.median, 1),
        })

    logger.info(f"Built market trend over {len(rows)} quarters")
    return pd.DataFrame(rows, columns=['quarter', 'avg_price', 'median_price'])


def get_property_price_trend(
    properties: pd.DataFrame,
    property_id: int,
    quarters: Sequence[str] = QUARTERS,
    jitter: Optional[JitterGenerator] = None,
    strict: bool = False
) -> pd.DataFrame:
    """
    Adjusted price of one property in every quarter.

    Unknown ids yield a price of 0.0 in every quarter.
    """
    subset = properties[properties['id'] == property_id]
    rows: List[dict] = []
    for quarter in quarters:
        adjusted = get_properties_for_quarter(subset, quarter, jitter=jitter, strict=strict)
        price = float(adjusted['adjusted_price_per_unit'].iloc[0]) if not adjusted.empty else 0.0
        rows.append({'quarter': quarter, 'price': price})

    if subset.empty:
        logger.warning(f"Property {property_id} not found; price trend is all zeros")
    return pd.DataFrame(rows, columns=['quarter', 'price'])
