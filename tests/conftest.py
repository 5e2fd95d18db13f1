"""Pytest configuration and shared fixtures."""

import tempfile
from pathlib import Path

import pytest

from fixtures.sample_data_generator import generate_economic_data, generate_property_data
from realty_analytics.data import EconomicTable, QUARTERS, load_economic_data, load_properties
from realty_analytics.engine import InvestmentAnalytics
from realty_analytics.models import JitterGenerator


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test outputs."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture(scope="session")
def properties():
    """The packaged 414-record dataset."""
    return load_properties()


@pytest.fixture(scope="session")
def economic_table():
    """The packaged 2020-Q1..2026-Q1 indicator table."""
    return load_economic_data()


@pytest.fixture
def sample_properties():
    """Small synthetic property set."""
    return generate_property_data(n_properties=40, seed=7)


@pytest.fixture
def sample_economic_table():
    """Synthetic indicator table over the known quarter axis."""
    return EconomicTable.from_frame(generate_economic_data(list(QUARTERS)))


@pytest.fixture
def jitter():
    return JitterGenerator(seed=12345)


@pytest.fixture
def analytics(sample_properties, sample_economic_table):
    """Analytics facade over the small synthetic dataset."""
    return InvestmentAnalytics(properties=sample_properties, economic=sample_economic_table)
