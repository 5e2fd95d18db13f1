"""Portfolio-level KPIs for one quarter."""

from dataclasses import dataclass, asdict
from typing import Optional
import logging

import pandas as pd

from ..config import constants
from ..data.economic import EconomicTable
from ..models.adjustment import get_properties_for_quarter
from ..models.jitter import JitterGenerator
from ..models.scoring import score_properties
from ..utils.numeric import round_half_up

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PortfolioSummary:
    quarter: str
    total_value: float
    avg_score: int
    property_count: int
    high_value_assets: int
    medium_value_assets: int
    low_value_assets: int
    projected_growth: float
    market_risk: str

    def to_dict(self) -> dict:
        return asdict(self)


def classify_market_risk(avg_score: float) -> str:
    """Low above 70, Medium above 50, otherwise High."""
    if avg_score > constants.LOW_RISK_SCORE:
        return "Low"
    if avg_score > constants.MEDIUM_RISK_SCORE:
        return "Medium"
    return "High"


def get_portfolio_summary(
    properties: pd.DataFrame,
    economic_table: EconomicTable,
    quarter: str = constants.ANCHOR_QUARTER,
    jitter: Optional[JitterGenerator] = None,
    projected_growth: float = constants.DEFAULT_PROJECTED_GROWTH,
    strict: bool = False
) -> PortfolioSummary:
    """
    Summarize value and score tiers of the whole property set.

    Scores require an economic snapshot for ``quarter``; without one every
    tier count is zero and the average score is 0 (High risk), while the
    total value is still reported.
    """
    adjusted = get_properties_for_quarter(properties, quarter, jitter=jitter, strict=strict)
    total_value = float(adjusted['adjusted_price_per_unit'].sum())

    if economic_table.get(quarter) is None:
        logger.warning(f"No economic data for {quarter}; portfolio scores unavailable")
        scores = pd.Series(dtype=int)
    else:
        scores = score_properties(adjusted)['score']

    avg_score = float(scores.mean()) if not scores.empty else 0.0

    summary = PortfolioSummary(
        quarter=quarter,
        total_value=total_value,
        avg_score=int(round_half_up(avg_score)),
        property_count=len(adjusted),
        high_value_assets=int((scores >= constants.HIGH_VALUE_SCORE).sum()),
        medium_value_assets=int(((scores >= constants.MEDIUM_VALUE_SCORE)
                                 & (scores < constants.HIGH_VALUE_SCORE)).sum()),
        low_value_assets=int((scores < constants.MEDIUM_VALUE_SCORE).sum()),
        projected_growth=projected_growth,
        market_risk=classify_market_risk(avg_score)
    )
    logger.info(
        f"Portfolio {quarter}: {summary.property_count} properties, "
        f"avg score {summary.avg_score}, risk {summary.market_risk}"
    )
    return summary
