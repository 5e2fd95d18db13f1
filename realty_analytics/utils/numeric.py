"""Numeric helpers shared by the analytics models."""

from typing import Union

import numpy as np
import pandas as pd

ArrayLike = Union[float, np.ndarray, pd.Series]


def round_half_up(values: ArrayLike, decimals: int = 0) -> ArrayLike:
    """
    Round halves toward positive infinity, as dashboard figures are rounded.

    ``numpy.round`` and the builtin ``round`` use banker's rounding, which
    would turn 2.5 into 2. Here 2.5 -> 3 and -2.5 -> -2.

    Parameters
    ----------
    values : float, np.ndarray or pd.Series
        Values to round
    decimals : int, default 0
        Number of decimal places

    Returns
    -------
    Same type as ``values``
    """
    factor = 10.0 ** decimals
    rounded = np.floor(np.asarray(values, dtype=float) * factor + 0.5) / factor

    if isinstance(values, pd.Series):
        return pd.Series(rounded, index=values.index, name=values.name)
    if np.ndim(rounded) == 0:
        return float(rounded)
    return rounded


def clip_score(values: ArrayLike, lower: float = 0.0, upper: float = 100.0) -> ArrayLike:
    """Clamp scores to [lower, upper]."""
    clipped = np.clip(values, lower, upper)
    if np.ndim(clipped) == 0:
        return float(clipped)
    return clipped
