"""Quarter adjustment of the static property records.

A property's price in a given quarter is simulated as::

    adjusted = base_price * quarter_mult * location_mult * age_mult * jitter

where ``quarter_mult`` comes from a fixed table (neutral 1.0 for quarters the
table does not cover), ``location_mult`` depends on distance-to-transit
bands, ``age_mult`` on the house's projected age in that quarter and
``jitter`` is a reproducible per-(property, quarter) factor in [0.95, 1.05).
"""

import math
from typing import Optional, Sequence, Tuple, Union
import logging

import numpy as np
import pandas as pd

from ..config import constants
from ..data.quarters import parse_quarter, elapsed_years
from ..utils.exceptions import UnknownQuarterError
from ..utils.numeric import round_half_up
from .jitter import JitterGenerator

logger = logging.getLogger(__name__)

Numeric = Union[float, np.ndarray, pd.Series]

_default_jitter = JitterGenerator()


def _banded(values: Numeric, bands: Sequence[Tuple[float, float]], fallback: float) -> Numeric:
    """Map values to the multiplier of the first band whose upper bound they are below."""
    array = np.asarray(values, dtype=float)
    result = np.select(
        [array < upper for upper, _ in bands],
        [multiplier for _, multiplier in bands],
        default=fallback
    )
    if isinstance(values, pd.Series):
        return pd.Series(result, index=values.index)
    if result.ndim == 0:
        return float(result)
    return result


def base_price_multiplier(quarter: str, strict: bool = False) -> float:
    """
    Market-wide price multiplier for ``quarter``.

    Quarters missing from the table get the neutral multiplier 1.0 and a
    warning is logged; with ``strict=True`` an :class:`UnknownQuarterError`
    is raised instead.
    """
    parse_quarter(quarter)
    multiplier = constants.QUARTERLY_PRICE_MULTIPLIERS.get(quarter)
    if multiplier is None:
        if strict:
            raise UnknownQuarterError(f"No price multiplier for quarter {quarter}")
        logger.warning(
            f"No price multiplier for {quarter}, using neutral {constants.NEUTRAL_MULTIPLIER}"
        )
        return constants.NEUTRAL_MULTIPLIER
    return multiplier


def location_multiplier(distance_to_mrt: Numeric) -> Numeric:
    """Appreciation multiplier by distance to the nearest MRT station (meters)."""
    return _banded(distance_to_mrt, constants.LOCATION_BANDS, constants.LOCATION_FALLBACK)


def age_multiplier(projected_age: Numeric) -> Numeric:
    """Multiplier by the house's age (years) in the target quarter."""
    return _banded(projected_age, constants.AGE_BANDS, constants.AGE_FALLBACK)


def get_properties_for_quarter(
    properties: pd.DataFrame,
    quarter: str,
    jitter: Optional[JitterGenerator] = None,
    strict: bool = False,
    include_components: bool = False
) -> pd.DataFrame:
    """
    Simulate every property's value in ``quarter``.

    Parameters
    ----------
    properties : pd.DataFrame
        Static property records
    quarter : str
        Target quarter label (``YYYY-Qn``)
    jitter : JitterGenerator, optional
        Jitter source; defaults to the package-wide seeded generator
    strict : bool, default False
        Raise for quarters missing from the multiplier table
    include_components : bool, default False
        Also return the individual multiplier columns

    Returns
    -------
    pd.DataFrame
        Copy of ``properties`` with ``house_age`` advanced to the quarter and
        ``quarter``, ``adjusted_price_per_unit`` and ``price_change`` added
    """
    jitter = jitter or _default_jitter
    base_mult = base_price_multiplier(quarter, strict=strict)
    years = elapsed_years(quarter)

    df = properties.copy()

    location_mult = np.asarray(location_multiplier(df['distance_to_mrt']), dtype=float)
    age_mult = np.asarray(age_multiplier(df['house_age'] + years), dtype=float)
    jitter_mult = jitter.factors(df['id'], quarter)

    total = base_mult * location_mult * age_mult * jitter_mult

    df['quarter'] = quarter
    df['house_age'] = df['house_age'] + math.floor(years)
    df['adjusted_price_per_unit'] = round_half_up(df['price_per_unit'].to_numpy(dtype=float) * total, 1)
    df['price_change'] = round_half_up((total - 1.0) * 100.0, 1)

    if include_components:
        df['quarter_multiplier'] = base_mult
        df['location_multiplier'] = location_mult
        df['age_multiplier'] = age_mult
        df['jitter'] = jitter_mult
        df['total_multiplier'] = total

    logger.debug(f"Adjusted {len(df):,} properties for {quarter} (base multiplier {base_mult})")
    return df


def quarterly_average_prices(
    properties: pd.DataFrame,
    quarters: Sequence[str],
    jitter: Optional[JitterGenerator] = None,
    strict: bool = False
) -> pd.Series:
    """
    Mean adjusted price per quarter.

    Quarters for which there are no properties get NaN.
    """
    values = []
    for quarter in quarters:
        adjusted = get_properties_for_quarter(properties, quarter, jitter=jitter, strict=strict)
        values.append(adjusted['adjusted_price_per_unit'].mean() if not adjusted.empty else np.nan)
    return pd.Series(values, index=pd.Index(list(quarters), name="quarter"), name="avg_price", dtype=float)
