"""Utility helpers for realty-analytics."""

from .exceptions import (
    RealtyAnalyticsError,
    DataValidationError,
    InvalidQuarterError,
    UnknownQuarterError
)
from .logging_config import setup_logging
from .numeric import round_half_up, clip_score

__all__ = [
    "RealtyAnalyticsError",
    "DataValidationError",
    "InvalidQuarterError",
    "UnknownQuarterError",
    "setup_logging",
    "round_half_up",
    "clip_score"
]
