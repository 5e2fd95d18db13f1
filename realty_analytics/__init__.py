"""
realty-analytics: investment analytics over a static property dataset

Simulates quarterly property values from a fixed set of transaction records,
then scores, forecasts and correlates them against macroeconomic indicators.
"""

__version__ = "0.1.0"
__author__ = "Realty Analytics Team"

from .config import constants, Settings, get_default_settings
from .data import load_properties, load_economic_data
from .engine import InvestmentAnalytics

__all__ = [
    "constants",
    "Settings",
    "get_default_settings",
    "load_properties",
    "load_economic_data",
    "InvestmentAnalytics"
]
