"""Rule-based market cycle classification from macro indicators."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from ..config import constants
from ..data.economic import EconomicSnapshot


class MarketPhase(Enum):
    RECOVERY = "Recovery"
    EXPANSION = "Expansion"
    PEAK = "Peak"
    RECESSION = "Recession"
    HYPERSUPPLY = "Hypersupply"


@dataclass(frozen=True)
class MarketCyclePhase:
    phase: MarketPhase
    confidence: int
    description: str


def rate_level(mortgage_rate_30y: float) -> str:
    if mortgage_rate_30y > constants.HIGH_MORTGAGE_RATE:
        return "high"
    if mortgage_rate_30y > constants.MEDIUM_MORTGAGE_RATE:
        return "medium"
    return "low"


def gdp_momentum(gdp_growth: float) -> str:
    if gdp_growth > constants.STRONG_GDP_GROWTH:
        return "strong"
    if gdp_growth > constants.MODERATE_GDP_GROWTH:
        return "moderate"
    return "weak"


def fed_stance(federal_funds_rate: float) -> str:
    if federal_funds_rate > constants.RESTRICTIVE_FED_FUNDS:
        return "restrictive"
    if federal_funds_rate > constants.NEUTRAL_FED_FUNDS:
        return "neutral"
    return "accommodative"


def determine_market_cycle(snapshot: Optional[EconomicSnapshot]) -> MarketCyclePhase:
    """
    Classify the market phase for one quarter's indicators.

    Rules are checked in order; the first match wins. A missing snapshot
    yields a low-confidence Expansion.
    """
    if snapshot is None:
        return MarketCyclePhase(MarketPhase.EXPANSION, 50, "Unable to determine")

    rates = rate_level(snapshot.mortgage_rate_30y)
    gdp = gdp_momentum(snapshot.gdp_growth)
    fed = fed_stance(snapshot.federal_funds_rate)

    if fed == "restrictive" and rates == "high" and gdp == "weak":
        return MarketCyclePhase(
            MarketPhase.RECESSION, 75,
            "High rates and weak growth suggest market correction phase"
        )
    if fed == "restrictive" and rates == "high":
        return MarketCyclePhase(
            MarketPhase.PEAK, 70,
            "High rates may cool the market after expansion phase"
        )
    if fed == "accommodative" or gdp == "strong":
        return MarketCyclePhase(
            MarketPhase.EXPANSION, 80,
            "Favorable financing conditions support market growth"
        )
    if gdp == "moderate" and rates == "medium":
        return MarketCyclePhase(
            MarketPhase.RECOVERY, 65,
            "Market stabilizing with moderate growth potential"
        )
    return MarketCyclePhase(
        MarketPhase.EXPANSION, 60,
        "Market showing steady growth patterns"
    )
