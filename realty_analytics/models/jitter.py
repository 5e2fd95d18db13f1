"""Seeded per-(property, quarter) price jitter."""

from typing import Dict, Iterable, Tuple

import numpy as np

from ..config import constants
from ..data.quarters import parse_quarter


class JitterGenerator:
    """
    Reproducible jitter factors in ``[low, high)``.

    Each factor is the first draw of a PCG64 generator seeded with
    ``[seed, property_id, year, quarter]``, so a property's jitter for a
    quarter depends only on those four numbers and never on which other
    properties are in the dataset or on call order.
    """

    def __init__(
        self,
        seed: int = constants.DEFAULT_JITTER_SEED,
        low: float = constants.JITTER_MIN,
        high: float = constants.JITTER_MAX
    ):
        if seed < 0:
            raise ValueError("Jitter seed must be non-negative")
        if not low < high:
            raise ValueError("Jitter bounds must satisfy low < high")
        self.seed = seed
        self.low = low
        self.high = high
        self._cache: Dict[Tuple[int, int, int], float] = {}

    def factor(self, property_id: int, quarter: str) -> float:
        """Jitter factor for a single property in ``quarter``."""
        period = parse_quarter(quarter)
        return self._draw(int(property_id), period.year, period.quarter)

    def factors(self, property_ids: Iterable[int], quarter: str) -> np.ndarray:
        """Jitter factors for many properties in ``quarter``."""
        period = parse_quarter(quarter)
        return np.array(
            [self._draw(int(pid), period.year, period.quarter) for pid in property_ids],
            dtype=float
        )

    def _draw(self, property_id: int, year: int, quarter: int) -> float:
        key = (property_id, year, quarter)
        value = self._cache.get(key)
        if value is None:
            rng = np.random.default_rng([self.seed, property_id, year, quarter])
            value = self.low + (self.high - self.low) * rng.random()
            self._cache[key] = value
        return value

    def __repr__(self) -> str:
        return f"JitterGenerator(seed={self.seed}, low={self.low}, high={self.high})"
