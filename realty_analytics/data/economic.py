"""Quarterly macroeconomic indicator table."""

from dataclasses import dataclass, asdict, fields
from types import MappingProxyType
from typing import Dict, Iterator, List, Mapping, Optional
import logging

import pandas as pd

from .quarters import parse_quarter, shift_quarter
from ..utils.exceptions import DataValidationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EconomicSnapshot:
    """Macro indicators for one quarter."""

    quarter: str
    mortgage_rate_30y: float  # 30-year fixed mortgage average (%)
    mortgage_rate_15y: float  # 15-year fixed mortgage average (%)
    unemployment_rate: float  # Civilian unemployment rate (%)
    cpi: float  # Consumer price index
    house_price_index: float  # National home price index
    building_permits: float  # New private housing units authorized (thousands)
    gdp_growth: float  # Annualized GDP growth (%)
    federal_funds_rate: float  # Effective federal funds rate (%)

    def to_dict(self) -> Dict[str, float]:
        return asdict(self)


INDICATOR_FIELDS = tuple(f.name for f in fields(EconomicSnapshot) if f.name != "quarter")


class EconomicTable:
    """
    Immutable mapping of quarter label to :class:`EconomicSnapshot`.

    Quarters absent from the table mean "no data"; lookups return ``None``
    rather than raising so dependent widgets can degrade gracefully.
    """

    def __init__(self, snapshots: Mapping[str, EconomicSnapshot]):
        ordered = sorted(snapshots.values(), key=lambda s: parse_quarter(s.quarter))
        self._snapshots = MappingProxyType({s.quarter: s for s in ordered})

    @classmethod
    def from_frame(cls, df: pd.DataFrame) -> "EconomicTable":
        """Build the table from a DataFrame with one row per quarter."""
        missing = [c for c in ("quarter",) + INDICATOR_FIELDS if c not in df.columns]
        if missing:
            raise DataValidationError(f"Economic data is missing columns: {missing}")

        snapshots = {}
        for record in df.to_dict(orient="records"):
            values = {name: float(record[name]) for name in INDICATOR_FIELDS}
            snapshot = EconomicSnapshot(quarter=str(record["quarter"]), **values)
            snapshots[snapshot.quarter] = snapshot
        return cls(snapshots)

    def __len__(self) -> int:
        return len(self._snapshots)

    def __contains__(self, quarter: object) -> bool:
        return quarter in self._snapshots

    def __iter__(self) -> Iterator[str]:
        return iter(self._snapshots)

    @property
    def quarters(self) -> List[str]:
        """Quarter labels in chronological order."""
        return list(self._snapshots)

    def get(self, quarter: str) -> Optional[EconomicSnapshot]:
        """Snapshot for ``quarter``, or None if there is no data."""
        return self._snapshots.get(quarter)

    def range(self, start: str, end: str) -> List[EconomicSnapshot]:
        """Snapshots from ``start`` to ``end`` inclusive; [] if either is unknown."""
        if start not in self._snapshots or end not in self._snapshots:
            return []
        lo, hi = parse_quarter(start), parse_quarter(end)
        return [s for q, s in self._snapshots.items() if lo <= parse_quarter(q) <= hi]

    def _value(self, quarter: str, field: str) -> Optional[float]:
        if field not in INDICATOR_FIELDS:
            raise ValueError(f"Unknown economic indicator: {field}")
        snapshot = self._snapshots.get(quarter)
        return None if snapshot is None else getattr(snapshot, field)

    def _percent_change(self, quarter: str, field: str, lag: int) -> Optional[float]:
        current = self._value(quarter, field)
        previous = self._value(shift_quarter(quarter, -lag), field)
        if current is None or previous is None or previous == 0:
            return None
        return (current - previous) / previous * 100

    def qoq_change(self, quarter: str, field: str) -> Optional[float]:
        """Quarter-over-quarter percent change of an indicator."""
        return self._percent_change(quarter, field, 1)

    def yoy_change(self, quarter: str, field: str) -> Optional[float]:
        """Year-over-year percent change of an indicator."""
        return self._percent_change(quarter, field, 4)

    def series(self, field: str, quarters: Optional[List[str]] = None, fill_value: float = 0.0) -> pd.Series:
        """
        Indicator values indexed by quarter.

        Quarters without a snapshot are filled with ``fill_value``.
        """
        if field not in INDICATOR_FIELDS:
            raise ValueError(f"Unknown economic indicator: {field}")
        quarters = self.quarters if quarters is None else list(quarters)
        values = [self._value(q, field) for q in quarters]
        return pd.Series(
            [fill_value if v is None else v for v in values],
            index=pd.Index(quarters, name="quarter"),
            name=field,
            dtype=float
        )

    def to_frame(self) -> pd.DataFrame:
        """Table as a DataFrame, one row per quarter."""
        return pd.DataFrame([s.to_dict() for s in self._snapshots.values()])
