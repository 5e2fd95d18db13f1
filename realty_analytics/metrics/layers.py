"""Map-layer metric configuration and value-to-colour helpers."""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional, Union

import numpy as np
import pandas as pd

from ..config import constants


class ColorScheme(Enum):
    """Which end of a metric's range is drawn red."""

    ASCENDING = "ascending"  # higher value = red
    DESCENDING = "descending"  # lower value = red


@dataclass(frozen=True)
class MetricConfig:
    key: str
    label: str
    unit: str
    description: str
    color_scheme: ColorScheme
    format: Callable[[float], str]


@dataclass(frozen=True)
class MetricStats:
    min: float
    max: float
    avg: float


METRICS: List[MetricConfig] = [
    MetricConfig(
        key="price_per_unit",
        label="Price per Unit",
        unit="$/unit",
        description="House price per unit area",
        color_scheme=ColorScheme.ASCENDING,
        format=lambda v: f"${v:.1f}",
    ),
    MetricConfig(
        key="lot_size",
        label="Lot Size",
        unit="sq ft",
        description="Total lot size in square feet",
        color_scheme=ColorScheme.ASCENDING,
        format=lambda v: f"{round(v):,} sq ft",
    ),
    MetricConfig(
        key="sqft",
        label="Living Area",
        unit="sq ft",
        description="Interior living space",
        color_scheme=ColorScheme.ASCENDING,
        format=lambda v: f"{round(v):,} sq ft",
    ),
    MetricConfig(
        key="year_built",
        label="Year Built",
        unit="year",
        description="Year the property was built",
        color_scheme=ColorScheme.ASCENDING,
        format=lambda v: f"{round(v)}",
    ),
    MetricConfig(
        key="house_age",
        label="House Age",
        unit="years",
        description="Age of the property",
        color_scheme=ColorScheme.DESCENDING,
        format=lambda v: f"{v:.1f} yrs",
    ),
    MetricConfig(
        key="distance_to_mrt",
        label="Distance to MRT",
        unit="m",
        description="Distance to nearest MRT station",
        color_scheme=ColorScheme.DESCENDING,
        format=lambda v: f"{v:.0f}m",
    ),
]

_METRICS_BY_KEY = {m.key: m for m in METRICS}


def get_metric_by_key(key: str) -> Optional[MetricConfig]:
    return _METRICS_BY_KEY.get(key)


def get_metric_stats(properties: pd.DataFrame, metric_key: str) -> MetricStats:
    """Min, max and mean of one column; ``(0, 1, 0)`` when there are no values."""
    if metric_key not in properties.columns:
        return MetricStats(0.0, 1.0, 0.0)

    values = properties[metric_key].dropna()
    if values.empty:
        return MetricStats(0.0, 1.0, 0.0)

    return MetricStats(float(values.min()), float(values.max()), float(values.mean()))


def normalize_value(
    value: float,
    min_value: float,
    max_value: float,
    color_scheme: Union[ColorScheme, str]
) -> float:
    """Position of ``value`` in [min, max], inverted for descending metrics."""
    span = (max_value - min_value) or 1.0
    normalized = (value - min_value) / span
    if ColorScheme(color_scheme) is ColorScheme.DESCENDING:
        normalized = 1.0 - normalized
    return normalized


def bucket_color(normalized: float) -> str:
    """Green/yellow/red for a normalised position."""
    if normalized < constants.COLOR_LOW_THRESHOLD:
        return constants.COLOR_LOW
    if normalized < constants.COLOR_HIGH_THRESHOLD:
        return constants.COLOR_MID
    return constants.COLOR_HIGH


def get_metric_color(
    value: float,
    min_value: float,
    max_value: float,
    color_scheme: Union[ColorScheme, str]
) -> str:
    """Marker colour for ``value`` within the visible range."""
    return bucket_color(normalize_value(value, min_value, max_value, color_scheme))


def get_metric_intensity(
    value: float,
    min_value: float,
    max_value: float,
    color_scheme: Union[ColorScheme, str]
) -> float:
    """Heatmap intensity in [0, 1]."""
    return float(np.clip(normalize_value(value, min_value, max_value, color_scheme), 0.0, 1.0))
