"""Metric accessors for map layers and distribution charts."""

from .layers import (
    ColorScheme,
    MetricConfig,
    MetricStats,
    METRICS,
    get_metric_by_key,
    get_metric_stats,
    normalize_value,
    bucket_color,
    get_metric_color,
    get_metric_intensity
)
from .distribution import MetricSummary, summarize_metric, build_histogram

__all__ = [
    "ColorScheme",
    "MetricConfig",
    "MetricStats",
    "METRICS",
    "get_metric_by_key",
    "get_metric_stats",
    "normalize_value",
    "bucket_color",
    "get_metric_color",
    "get_metric_intensity",
    "MetricSummary",
    "summarize_metric",
    "build_histogram"
]
