"""Constants for the real-estate analytics core."""

from types import MappingProxyType

# Quarter axis
FIRST_QUARTER = "2020-Q1"  # First quarter of the synthetic time axis
ANCHOR_QUARTER = "2026-Q1"  # Last historical quarter, forecasts start after it
BASE_QUARTER = "2013-Q1"  # Quarter the static dataset was recorded in
QUARTER_PATTERN = r"^(\d{4})-Q([1-4])$"

# Price adjustment multipliers relative to the base dataset
QUARTERLY_PRICE_MULTIPLIERS = MappingProxyType({
    "2020-Q1": 1.35,
    "2020-Q2": 1.32,  # COVID dip
    "2020-Q3": 1.40,
    "2020-Q4": 1.48,
    "2021-Q1": 1.55,
    "2021-Q2": 1.65,
    "2021-Q3": 1.72,
    "2021-Q4": 1.78,
    "2022-Q1": 1.85,
    "2022-Q2": 1.92,  # Peak before rate hikes
    "2022-Q3": 1.88,
    "2022-Q4": 1.82,
    "2023-Q1": 1.78,
    "2023-Q2": 1.82,
    "2023-Q3": 1.88,
    "2023-Q4": 1.92,
    "2024-Q1": 1.96,
    "2024-Q2": 2.00,
    "2024-Q3": 2.03,
    "2024-Q4": 2.06,
    "2025-Q1": 2.10,
    "2025-Q2": 2.14,
    "2025-Q3": 2.18,
    "2025-Q4": 2.22,
    "2026-Q1": 2.25,
})
NEUTRAL_MULTIPLIER = 1.0

# Distance-to-transit bands: (upper bound in meters, multiplier)
LOCATION_BANDS = ((500.0, 1.15), (1000.0, 1.08), (2000.0, 1.02))
LOCATION_FALLBACK = 0.95

# Projected age bands: (upper bound in years, multiplier)
AGE_BANDS = ((10.0, 1.05), (20.0, 1.00), (30.0, 0.95))
AGE_FALLBACK = 0.90

# Deterministic jitter
JITTER_MIN = 0.95
JITTER_MAX = 1.05
DEFAULT_JITTER_SEED = 12345

# Investment score weights (must sum to 1.0)
SCORE_WEIGHTS = MappingProxyType({
    "yield_score": 0.35,
    "appreciation_score": 0.35,
    "volatility_score": 0.15,
    "location_score": 0.10,
    "affordability_score": 0.05,
})
SCORE_MIN = 0.0
SCORE_MAX = 100.0
YIELD_PRICE_DIVISOR = 50.0
APPRECIATION_BASELINE = 50.0
VOLATILITY_DISTANCE_DIVISOR = 30.0
LOCATION_POINTS_PER_STORE = 10.0
AFFORDABILITY_BANDS = ((5.0, 80.0), (15.0, 60.0), (30.0, 40.0))
AFFORDABILITY_FALLBACK = 20.0

# Portfolio tiers
HIGH_VALUE_SCORE = 70
MEDIUM_VALUE_SCORE = 40
LOW_RISK_SCORE = 70
MEDIUM_RISK_SCORE = 50
DEFAULT_PROJECTED_GROWTH = 8.5  # Percent, shown on the KPI cards

# Forecast parameters
DEFAULT_QUARTERS_AHEAD = 8
FORECAST_GROWTH_STEP = 0.005  # Growth added per projected quarter
CONFIDENCE_Z_SCORE = 1.96  # 95% two-sided
CONFIDENCE_WIDENING = 0.3  # Relative widening per projected quarter

# Stress test sensitivities (% value change per 1% shock)
INTEREST_RATE_SENSITIVITY = -5.0
VACANCY_SENSITIVITY = -2.0
RENT_GROWTH_SENSITIVITY = 3.0

# Market cycle thresholds
HIGH_MORTGAGE_RATE = 7.0
MEDIUM_MORTGAGE_RATE = 5.0
STRONG_GDP_GROWTH = 3.0
MODERATE_GDP_GROWTH = 0.0
RESTRICTIVE_FED_FUNDS = 4.5
NEUTRAL_FED_FUNDS = 2.0

# Economic indicators correlated against property prices
CORRELATION_INDICATORS = MappingProxyType({
    "mortgage_rate_30y": "Mortgage Rate",
    "unemployment_rate": "Unemployment",
    "cpi": "CPI",
    "house_price_index": "HPI",
    "federal_funds_rate": "Fed Funds Rate",
})
PRICE_SERIES_LABEL = "Property Price"

# Metric distribution
DEFAULT_HISTOGRAM_BINS = 12
COLOR_LOW = "#22c55e"  # green
COLOR_MID = "#eab308"  # yellow
COLOR_HIGH = "#ef4444"  # red
COLOR_LOW_THRESHOLD = 0.33
COLOR_HIGH_THRESHOLD = 0.66

# File formats
SUPPORTED_INPUT_FORMATS = [".csv", ".parquet", ".feather"]
DEFAULT_OUTPUT_FORMAT = ".csv"

# Analytics facade
MAX_CACHE_ENTRIES = 256  # Least recently used entries are evicted past this
