"""Data module: static datasets, schemas and the quarter axis."""

from .quarters import (
    QUARTERS,
    is_quarter_label,
    parse_quarter,
    format_quarter,
    shift_quarter,
    quarters_between,
    quarter_range,
    quarter_index,
    elapsed_years
)
from .economic import EconomicSnapshot, EconomicTable, INDICATOR_FIELDS
from .schemas import (
    property_schema,
    economic_schema,
    validate_properties,
    validate_economic_data
)
from .loaders import (
    load_properties,
    load_economic_data,
    save_results
)

__all__ = [
    "QUARTERS",
    "is_quarter_label",
    "parse_quarter",
    "format_quarter",
    "shift_quarter",
    "quarters_between",
    "quarter_range",
    "quarter_index",
    "elapsed_years",
    "EconomicSnapshot",
    "EconomicTable",
    "INDICATOR_FIELDS",
    "property_schema",
    "economic_schema",
    "validate_properties",
    "validate_economic_data",
    "load_properties",
    "load_economic_data",
    "save_results"
]
