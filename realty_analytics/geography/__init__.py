"""Geographic helpers for the property map."""

from .viewport import Bounds, filter_visible_properties

__all__ = ["Bounds", "filter_visible_properties"]
