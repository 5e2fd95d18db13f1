"""Data loading utilities for the static property and economic tables."""

import pandas as pd
from pathlib import Path
from typing import Union, Optional
import logging

from .schemas import validate_properties, validate_economic_data, PROPERTY_COLUMNS
from .economic import EconomicTable
from ..config import constants

logger = logging.getLogger(__name__)

RESOURCE_DIR = Path(__file__).parent / "resources"
DEFAULT_PROPERTIES_PATH = RESOURCE_DIR / "properties.csv"
DEFAULT_ECONOMIC_PATH = RESOURCE_DIR / "economic_indicators.csv"


def _read_frame(filepath: Path, **kwargs) -> pd.DataFrame:
    """Read a DataFrame, choosing the reader from the file extension."""
    file_ext = filepath.suffix.lower()

    if file_ext == '.csv':
        return pd.read_csv(filepath, **kwargs)
    elif file_ext == '.parquet':
        return pd.read_parquet(filepath, **kwargs)
    elif file_ext == '.feather':
        return pd.read_feather(filepath, **kwargs)

    raise ValueError(
        f"Unsupported file format: {file_ext}. "
        f"Supported formats: {constants.SUPPORTED_INPUT_FORMATS}"
    )


def load_properties(
    filepath: Optional[Union[str, Path]] = None,
    validate: bool = True,
    **kwargs
) -> pd.DataFrame:
    """
    Load the static property records.

    Parameters
    ----------
    filepath : str or Path, optional
        Path to a property file. Defaults to the packaged 414-record dataset.
    validate : bool, default True
        Whether to validate data against schema
    **kwargs
        Additional arguments passed to pandas read function

    Returns
    -------
    pd.DataFrame
        Property records sorted by id

    Raises
    ------
    FileNotFoundError
        If the file does not exist
    ValueError
        If file format is not supported
    pa.errors.SchemaError
        If validation fails
    """
    filepath = Path(filepath) if filepath is not None else DEFAULT_PROPERTIES_PATH

    if not filepath.exists():
        raise FileNotFoundError(f"Property file not found: {filepath}")

    df = _read_frame(filepath, **kwargs)

    if validate:
        df = validate_properties(df)
        logger.info(f"Loaded and validated {len(df):,} properties from {filepath.name}")
    else:
        logger.info(f"Loaded {len(df):,} properties from {filepath.name} (unvalidated)")

    ordered = [c for c in PROPERTY_COLUMNS if c in df.columns]
    extra = [c for c in df.columns if c not in ordered]
    return df[ordered + extra].sort_values('id').reset_index(drop=True)


def load_economic_data(
    filepath: Optional[Union[str, Path]] = None,
    validate: bool = True,
    **kwargs
) -> EconomicTable:
    """
    Load the quarterly economic indicator table.

    Parameters
    ----------
    filepath : str or Path, optional
        Path to an indicator file. Defaults to the packaged 2020-2026 series.
    validate : bool, default True
        Whether to validate data against schema
    **kwargs
        Additional arguments passed to pandas read function

    Returns
    -------
    EconomicTable
        Immutable quarter -> snapshot table
    """
    filepath = Path(filepath) if filepath is not None else DEFAULT_ECONOMIC_PATH

    if not filepath.exists():
        raise FileNotFoundError(f"Economic data file not found: {filepath}")

    df = _read_frame(filepath, **kwargs)

    if validate:
        df = validate_economic_data(df)

    table = EconomicTable.from_frame(df)
    logger.info(f"Loaded economic indicators for {len(table)} quarters")
    return table


def save_results(
    df: pd.DataFrame,
    filepath: Union[str, Path],
    format: Optional[str] = None,
    **kwargs
) -> None:
    """
    Save results to file.

    Parameters
    ----------
    df : pd.DataFrame
        Data to save
    filepath : str or Path
        Output file path
    format : str, optional
        Output format. If None, inferred from filepath extension
    **kwargs
        Additional arguments passed to pandas write function
    """
    filepath = Path(filepath)

    # Create directory if needed
    filepath.parent.mkdir(parents=True, exist_ok=True)

    # Determine format
    if format is None:
        format = filepath.suffix.lower() or constants.DEFAULT_OUTPUT_FORMAT
    else:
        format = format.lower()
        if not format.startswith('.'):
            format = f'.{format}'

    if format == '.csv':
        df.to_csv(filepath, index=False, **kwargs)
    elif format == '.parquet':
        df.to_parquet(filepath, **kwargs)
    elif format == '.feather':
        df.reset_index(drop=True).to_feather(filepath, **kwargs)
    else:
        raise ValueError(f"Unsupported output format: {format}")

    logger.info(f"Saved {len(df):,} rows to {filepath}")
