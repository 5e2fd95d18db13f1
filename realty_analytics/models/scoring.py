"""Composite investment scoring for quarter-adjusted properties."""

from dataclasses import dataclass, asdict
from typing import Any, Dict, List, Mapping, Optional, Sequence, Union
import logging

import numpy as np
import pandas as pd

from ..config import constants
from ..data.economic import EconomicSnapshot, EconomicTable
from ..utils.numeric import clip_score, round_half_up
from .adjustment import get_properties_for_quarter
from .jitter import JitterGenerator

logger = logging.getLogger(__name__)

SUB_SCORES = tuple(constants.SCORE_WEIGHTS)
SCORE_COLUMNS = ("property_id", "score") + SUB_SCORES


@dataclass(frozen=True)
class PropertyScore:
    """Investment attractiveness of one property in one quarter (0-100)."""

    property_id: int
    score: int
    yield_score: int
    appreciation_score: int
    volatility_score: int
    location_score: int
    affordability_score: int

    def to_dict(self) -> Dict[str, int]:
        return asdict(self)


def _sub_scores(
    price: np.ndarray,
    price_change: np.ndarray,
    distance: np.ndarray,
    stores: np.ndarray,
    age: np.ndarray
) -> Dict[str, np.ndarray]:
    """Unrounded, clamped sub-scores."""
    lo, hi = constants.SCORE_MIN, constants.SCORE_MAX

    affordability = np.select(
        [age < upper for upper, _ in constants.AFFORDABILITY_BANDS],
        [points for _, points in constants.AFFORDABILITY_BANDS],
        default=constants.AFFORDABILITY_FALLBACK
    )

    return {
        # Cheaper units leave more room for rental yield
        "yield_score": clip_score(100.0 - price / constants.YIELD_PRICE_DIVISOR, lo, hi),
        "appreciation_score": clip_score(constants.APPRECIATION_BASELINE + price_change, lo, hi),
        # Transit-adjacent properties hold value more steadily
        "volatility_score": clip_score(100.0 - distance / constants.VOLATILITY_DISTANCE_DIVISOR, lo, hi),
        "location_score": clip_score(stores * constants.LOCATION_POINTS_PER_STORE, lo, hi),
        "affordability_score": clip_score(affordability, lo, hi),
    }


def score_properties(adjusted: pd.DataFrame) -> pd.DataFrame:
    """
    Score quarter-adjusted properties.

    Parameters
    ----------
    adjusted : pd.DataFrame
        Output of :func:`get_properties_for_quarter`

    Returns
    -------
    pd.DataFrame
        One row per property with ``property_id``, ``score`` and the five
        sub-scores, all integers in [0, 100]
    """
    if adjusted.empty:
        return pd.DataFrame({col: pd.Series(dtype=int) for col in SCORE_COLUMNS})

    price_change = adjusted['price_change'] if 'price_change' in adjusted else pd.Series(0.0, index=adjusted.index)

    subs = _sub_scores(
        adjusted['adjusted_price_per_unit'].to_numpy(dtype=float),
        price_change.fillna(0.0).to_numpy(dtype=float),
        adjusted['distance_to_mrt'].to_numpy(dtype=float),
        adjusted['convenience_stores'].to_numpy(dtype=float),
        adjusted['house_age'].to_numpy(dtype=float)
    )

    total = sum(subs[name] * weight for name, weight in constants.SCORE_WEIGHTS.items())
    total = clip_score(total, constants.SCORE_MIN, constants.SCORE_MAX)

    result = pd.DataFrame({'property_id': adjusted['id'].to_numpy()})
    result['score'] = round_half_up(total).astype(int)
    for name in SUB_SCORES:
        result[name] = round_half_up(subs[name]).astype(int)
    return result


def calculate_property_score(
    prop: Union[Mapping[str, Any], pd.Series],
    economic: Optional[EconomicSnapshot] = None
) -> PropertyScore:
    """
    Score a single quarter-adjusted property.

    ``economic`` is accepted for the quarter's macro context but none of the
    sub-score formulas read it.
    """
    frame = pd.DataFrame([dict(prop)])
    row = score_properties(frame).iloc[0]
    return PropertyScore(**{col: int(row[col]) for col in SCORE_COLUMNS})


def get_all_property_scores(
    properties: pd.DataFrame,
    economic_table: EconomicTable,
    quarter: str = constants.ANCHOR_QUARTER,
    jitter: Optional[JitterGenerator] = None,
    strict: bool = False
) -> List[PropertyScore]:
    """
    Score every property in ``quarter``.

    Returns an empty list when the economic table has no snapshot for the
    quarter.
    """
    if economic_table.get(quarter) is None:
        logger.warning(f"No economic data for {quarter}, skipping property scores")
        return []

    adjusted = get_properties_for_quarter(properties, quarter, jitter=jitter, strict=strict)
    frame = score_properties(adjusted)
    logger.debug(f"Scored {len(frame):,} properties for {quarter}")
    return [
        PropertyScore(**{col: int(value) for col, value in record.items()})
        for record in frame.to_dict(orient="records")
    ]


def scores_to_frame(scores: Sequence[PropertyScore]) -> pd.DataFrame:
    """Convert a list of scores to a DataFrame."""
    if not scores:
        return pd.DataFrame({col: pd.Series(dtype=int) for col in SCORE_COLUMNS})
    return pd.DataFrame([s.to_dict() for s in scores], columns=list(SCORE_COLUMNS))


def rank_scores(
    scores: Union[Sequence[PropertyScore], pd.DataFrame],
    by: str = "score",
    ascending: bool = False,
    top: Optional[int] = None
) -> pd.DataFrame:
    """Sort scores by one column, optionally keeping only the first ``top`` rows."""
    frame = scores if isinstance(scores, pd.DataFrame) else scores_to_frame(scores)
    if by not in frame.columns:
        raise ValueError(f"Cannot sort by {by!r}; choose one of {list(frame.columns)}")

    ranked = frame.sort_values(by, ascending=ascending, kind="mergesort").reset_index(drop=True)
    if top is not None:
        ranked = ranked.head(top)
    return ranked
