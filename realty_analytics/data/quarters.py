"""Quarter label arithmetic on top of pandas quarterly periods.

Quarters are labelled ``"YYYY-Qn"`` throughout the package. Internally they
are converted to ``pd.Period`` objects with quarterly frequency, which gives
a total order and integer arithmetic for free.
"""

import re
from typing import List, Tuple

import pandas as pd

from ..config import constants
from ..utils.exceptions import InvalidQuarterError

_QUARTER_RE = re.compile(constants.QUARTER_PATTERN)


def is_quarter_label(label: str) -> bool:
    """Return True if ``label`` has the ``YYYY-Qn`` form."""
    return isinstance(label, str) and _QUARTER_RE.match(label) is not None


def parse_quarter(label: str) -> pd.Period:
    """
    Convert a ``YYYY-Qn`` label to a quarterly ``pd.Period``.

    Raises
    ------
    InvalidQuarterError
        If the label is malformed
    """
    match = _QUARTER_RE.match(label) if isinstance(label, str) else None
    if match is None:
        raise InvalidQuarterError(f"Invalid quarter label: {label!r} (expected YYYY-Qn)")

    year, quarter = int(match.group(1)), int(match.group(2))
    return pd.Period(year=year, quarter=quarter, freq="Q")


def format_quarter(period: pd.Period) -> str:
    """Convert a quarterly period back to its ``YYYY-Qn`` label."""
    return f"{period.year}-Q{period.quarter}"


def shift_quarter(label: str, n: int) -> str:
    """Return the label ``n`` quarters after (or before, if negative) ``label``."""
    return format_quarter(parse_quarter(label) + n)


def quarters_between(start: str, end: str) -> int:
    """Signed number of quarters from ``start`` to ``end``."""
    return parse_quarter(end).ordinal - parse_quarter(start).ordinal


def quarter_range(start: str, end: str) -> List[str]:
    """All labels from ``start`` to ``end`` inclusive; empty if end < start."""
    start_period = parse_quarter(start)
    end_period = parse_quarter(end)
    if end_period < start_period:
        return []
    return [format_quarter(p) for p in pd.period_range(start_period, end_period, freq="Q")]


def quarter_index(label: str) -> int:
    """Position of ``label`` on the quarter axis (negative before its start)."""
    return quarters_between(constants.FIRST_QUARTER, label)


def elapsed_years(label: str, base: str = constants.BASE_QUARTER) -> float:
    """Years elapsed between the dataset's base quarter and ``label``."""
    return quarters_between(base, label) / 4.0


# Known quarter axis shown by the time slider
QUARTERS: Tuple[str, ...] = tuple(quarter_range(constants.FIRST_QUARTER, constants.ANCHOR_QUARTER))
