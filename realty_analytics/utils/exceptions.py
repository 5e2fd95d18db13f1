"""Custom exceptions for realty-analytics."""


class RealtyAnalyticsError(Exception):
    """Base exception for realty-analytics package."""
    pass


class DataValidationError(RealtyAnalyticsError, ValueError):
    """Raised when a dataset does not have the expected shape."""
    pass


class InvalidQuarterError(RealtyAnalyticsError, ValueError):
    """Raised when a quarter label is not of the form YYYY-Qn."""
    pass


class UnknownQuarterError(RealtyAnalyticsError, KeyError):
    """Raised in strict mode when a quarter has no lookup table entry."""
    pass
