"""Histogram and summary statistics for a metric over visible properties."""

from dataclasses import dataclass
from typing import Optional, Tuple

import pandas as pd

from ..config import constants
from .layers import ColorScheme, MetricConfig, bucket_color, get_metric_by_key

HISTOGRAM_COLUMNS = ['bin_min', 'bin_max', 'count', 'color', 'label']


@dataclass(frozen=True)
class MetricSummary:
    min: float
    max: float
    avg: float
    median: float


def summarize_metric(properties: pd.DataFrame, metric_key: str) -> MetricSummary:
    """
    Min/max/mean/median of a metric.

    Even-length medians average the two middle values. Empty input gives
    zeros.
    """
    if properties.empty or metric_key not in properties.columns:
        return MetricSummary(0.0, 0.0, 0.0, 0.0)

    values = properties[metric_key].dropna()
    if values.empty:
        return MetricSummary(0.0, 0.0, 0.0, 0.0)

    return MetricSummary(
        min=float(values.min()),
        max=float(values.max()),
        avg=float(values.mean()),
        median=float(values.median())
    )


def build_histogram(
    properties: pd.DataFrame,
    metric_key: str,
    bin_count: int = constants.DEFAULT_HISTOGRAM_BINS,
    value_range: Optional[Tuple[float, float]] = None
) -> pd.DataFrame:
    """
    Equal-width histogram of a metric, coloured by bin position.

    Parameters
    ----------
    properties : pd.DataFrame
        Properties to bin (usually those inside the map viewport)
    metric_key : str
        Column to bin
    bin_count : int, default 12
        Number of bins
    value_range : tuple of float, optional
        Fixed ``(min, max)`` for the bins. Defaults to the data's range.

    Returns
    -------
    pd.DataFrame
        One row per bin with ``bin_min``, ``bin_max``, ``count``, ``color``
        and ``label``. Bins are half-open except the last, which includes
        its upper edge. Empty input gives an empty frame.
    """
    if bin_count < 1:
        raise ValueError("bin_count must be at least 1")
    if value_range is not None and value_range[1] < value_range[0]:
        raise ValueError(f"value_range is reversed: {value_range}")

    if properties.empty or metric_key not in properties.columns:
        return pd.DataFrame(columns=HISTOGRAM_COLUMNS)

    metric = get_metric_by_key(metric_key)
    scheme = metric.color_scheme if metric else ColorScheme.ASCENDING

    values = properties[metric_key].dropna().to_numpy(dtype=float)
    if values.size == 0:
        return pd.DataFrame(columns=HISTOGRAM_COLUMNS)

    if value_range is None:
        lo, hi = float(values.min()), float(values.max())
    else:
        lo, hi = value_range
    bin_size = (hi - lo) / bin_count or 1.0

    rows = []
    for i in range(bin_count):
        bin_min = lo + i * bin_size
        bin_max = lo + (i + 1) * bin_size
        if i == bin_count - 1:
            # Accumulated float error must not push the range maximum out
            bin_max = max(bin_max, hi)
            in_bin = (values >= bin_min) & (values <= bin_max)
        else:
            in_bin = (values >= bin_min) & (values < bin_max)

        position = i / (bin_count - 1) if bin_count > 1 else 0.0
        if scheme is ColorScheme.DESCENDING:
            position = 1.0 - position

        rows.append({
            'bin_min': bin_min,
            'bin_max': bin_max,
            'count': int(in_bin.sum()),
            'color': bucket_color(position),
            'label': _format_label(metric, bin_min),
        })

    return pd.DataFrame(rows, columns=HISTOGRAM_COLUMNS)


def _format_label(metric: Optional[MetricConfig], value: float) -> str:
    if metric is None:
        return f"{value:.1f}"
    return metric.format(value)
