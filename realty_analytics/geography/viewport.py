"""Map viewport bounds and visible-property filtering."""

from dataclasses import dataclass
from typing import Iterable, Tuple
import logging

import pandas as pd

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Bounds:
    """Axis-aligned lat/lon rectangle, edges inclusive."""

    south: float
    west: float
    north: float
    east: float

    def __post_init__(self):
        if self.south > self.north:
            raise ValueError(f"South edge {self.south} is north of north edge {self.north}")
        if self.west > self.east:
            raise ValueError(f"West edge {self.west} is east of east edge {self.east}")

    @classmethod
    def from_points(cls, points: Iterable[Tuple[float, float]]) -> "Bounds":
        """Smallest bounds containing every ``(lat, lon)`` point."""
        points = list(points)
        if not points:
            raise ValueError("Cannot build bounds from no points")
        lats = [lat for lat, _ in points]
        lons = [lon for _, lon in points]
        return cls(min(lats), min(lons), max(lats), max(lons))

    @property
    def center(self) -> Tuple[float, float]:
        return ((self.south + self.north) / 2, (self.west + self.east) / 2)

    def contains(self, latitude: float, longitude: float) -> bool:
        return self.south <= latitude <= self.north and self.west <= longitude <= self.east

    def mask(self, latitudes: pd.Series, longitudes: pd.Series) -> pd.Series:
        """Vectorised :meth:`contains`."""
        return (
            latitudes.between(self.south, self.north)
            & longitudes.between(self.west, self.east)
        )


def filter_visible_properties(properties: pd.DataFrame, bounds: Bounds) -> pd.DataFrame:
    """Rows whose ``latitude``/``longitude`` lie inside ``bounds``."""
    visible = properties[bounds.mask(properties['latitude'], properties['longitude'])]
    logger.debug(f"{len(visible):,} of {len(properties):,} properties inside viewport")
    return visible.reset_index(drop=True)
