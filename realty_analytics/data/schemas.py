"""Data validation schemas using Pandera for the property and economic tables."""

import pandas as pd
import pandera.pandas as pa

from ..config import constants


PROPERTY_COLUMNS = [
    "id",
    "transaction_date",
    "house_age",
    "distance_to_mrt",
    "convenience_stores",
    "latitude",
    "longitude",
    "price_per_unit",
    "lot_size",
    "sqft",
    "year_built",
    "bedrooms",
    "bathrooms",
]

ECONOMIC_COLUMNS = [
    "quarter",
    "mortgage_rate_30y",
    "mortgage_rate_15y",
    "unemployment_rate",
    "cpi",
    "house_price_index",
    "building_permits",
    "gdp_growth",
    "federal_funds_rate",
]


# Static property transaction records
property_schema = pa.DataFrameSchema({
    "id": pa.Column(
        int,
        nullable=False,
        unique=True,
        checks=[pa.Check.greater_than(0)],
        coerce=True,
        description="Record identifier"
    ),
    "transaction_date": pa.Column(
        float,
        nullable=False,
        checks=[pa.Check.in_range(1900, 2100)],
        coerce=True,
        description="Transaction date as a decimal year (2013.25 = March 2013)"
    ),
    "house_age": pa.Column(
        float,
        nullable=False,
        checks=[pa.Check.greater_than_or_equal_to(0)],
        coerce=True,
        description="House age in years at transaction time"
    ),
    "distance_to_mrt": pa.Column(
        float,
        nullable=False,
        checks=[pa.Check.greater_than_or_equal_to(0)],
        coerce=True,
        description="Distance to the nearest MRT station in meters"
    ),
    "convenience_stores": pa.Column(
        int,
        nullable=False,
        checks=[pa.Check.greater_than_or_equal_to(0)],
        coerce=True,
        description="Number of convenience stores within walking distance"
    ),
    "latitude": pa.Column(
        float,
        nullable=False,
        checks=[pa.Check.in_range(-90, 90)],
        coerce=True
    ),
    "longitude": pa.Column(
        float,
        nullable=False,
        checks=[pa.Check.in_range(-180, 180)],
        coerce=True
    ),
    "price_per_unit": pa.Column(
        float,
        nullable=False,
        checks=[pa.Check.greater_than(0)],
        coerce=True,
        description="House price per unit area"
    ),
    "lot_size": pa.Column(
        int,
        nullable=False,
        checks=[pa.Check.greater_than_or_equal_to(0)],
        coerce=True,
        description="Lot size in square feet"
    ),
    "sqft": pa.Column(
        int,
        nullable=False,
        checks=[pa.Check.greater_than(0)],
        coerce=True,
        description="Interior living area in square feet"
    ),
    "year_built": pa.Column(int, nullable=False, coerce=True),
    "bedrooms": pa.Column(
        int,
        nullable=False,
        checks=[pa.Check.in_range(1, 6)],
        coerce=True
    ),
    "bathrooms": pa.Column(
        int,
        nullable=False,
        checks=[pa.Check.in_range(1, 4)],
        coerce=True
    ),
}, strict=False)


# Quarterly macroeconomic indicators
economic_schema = pa.DataFrameSchema({
    "quarter": pa.Column(
        str,
        nullable=False,
        unique=True,
        checks=[
            pa.Check(lambda x: x.str.match(constants.QUARTER_PATTERN).all(),
                     error="Quarter labels must look like YYYY-Qn")
        ],
        description="Quarter label"
    ),
    "mortgage_rate_30y": pa.Column(float, nullable=False, checks=[pa.Check.greater_than_or_equal_to(0)], coerce=True),
    "mortgage_rate_15y": pa.Column(float, nullable=False, checks=[pa.Check.greater_than_or_equal_to(0)], coerce=True),
    "unemployment_rate": pa.Column(float, nullable=False, checks=[pa.Check.in_range(0, 100)], coerce=True),
    "cpi": pa.Column(float, nullable=False, checks=[pa.Check.greater_than(0)], coerce=True),
    "house_price_index": pa.Column(float, nullable=False, checks=[pa.Check.greater_than(0)], coerce=True),
    "building_permits": pa.Column(float, nullable=False, checks=[pa.Check.greater_than_or_equal_to(0)], coerce=True),
    "gdp_growth": pa.Column(float, nullable=False, coerce=True),
    "federal_funds_rate": pa.Column(float, nullable=False, checks=[pa.Check.greater_than_or_equal_to(0)], coerce=True),
})


def validate_properties(df: pd.DataFrame) -> pd.DataFrame:
    """
    Validate property records against schema.

    Parameters
    ----------
    df : pd.DataFrame
        Raw property records

    Returns
    -------
    pd.DataFrame
        Validated property records

    Raises
    ------
    pa.errors.SchemaError
        If validation fails
    """
    return property_schema.validate(df)


def validate_economic_data(df: pd.DataFrame) -> pd.DataFrame:
    """
    Validate quarterly economic indicators against schema.

    Parameters
    ----------
    df : pd.DataFrame
        Raw economic indicator table

    Returns
    -------
    pd.DataFrame
        Validated table

    Raises
    ------
    pa.errors.SchemaError
        If validation fails
    """
    df = df.copy()
    df['quarter'] = df['quarter'].astype(str)
    return economic_schema.validate(df)
