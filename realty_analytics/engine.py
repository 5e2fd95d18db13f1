"""Facade over the analytics functions with a per-dataset memoization boundary."""

import hashlib
from collections import OrderedDict
from typing import Any, Callable, Hashable, List, Optional
import logging

import pandas as pd

from .config import Settings, constants, get_default_settings
from .data import EconomicSnapshot, EconomicTable, load_economic_data, load_properties
from .aggregation import (
    PortfolioSummary,
    QuarterStats,
    get_market_trend,
    get_portfolio_summary,
    get_property_price_trend,
    get_quarter_stats
)
from .geography import Bounds, filter_visible_properties
from .metrics import build_histogram
from .models import (
    CorrelationResult,
    ForecastPoint,
    JitterGenerator,
    MarketCyclePhase,
    PropertyScore,
    StressScenario,
    calculate_correlations,
    calculate_stress_scenario,
    determine_market_cycle,
    generate_forecast,
    get_all_property_scores,
    get_properties_for_quarter,
    rank_scores
)

logger = logging.getLogger(__name__)


class InvestmentAnalytics:
    """
    Investment analytics over one property dataset and economic table.

    Derived series are cached under ``(name, args, dataset_version)``, where
    ``dataset_version`` is a content hash of the property frame. Assigning
    ``properties`` recomputes the version. The cache keeps at most
    ``max_cache_entries`` results and evicts the least recently used.
    """

    def __init__(
        self,
        properties: Optional[pd.DataFrame] = None,
        economic: Optional[EconomicTable] = None,
        settings: Optional[Settings] = None,
        max_cache_entries: int = constants.MAX_CACHE_ENTRIES
    ):
        """
        Initialize analytics.

        Args:
            properties: Property records (default: packaged dataset or
                ``settings.properties_path``)
            economic: Economic table (default: packaged table or
                ``settings.economic_data_path``)
            settings: Run settings
            max_cache_entries: Cache size bound (must be positive)
        """
        self.settings = settings or get_default_settings()
        self.settings.validate()
        if max_cache_entries < 1:
            raise ValueError("max_cache_entries must be at least 1")
        self.max_cache_entries = max_cache_entries
        self._cache: "OrderedDict[Hashable, Any]" = OrderedDict()

        if properties is None:
            properties = load_properties(self.settings.properties_path)
        self.properties = properties

        self.economic = economic if economic is not None else load_economic_data(
            self.settings.economic_data_path
        )
        self.jitter = JitterGenerator(self.settings.jitter_seed)

        logger.info(
            f"Initialized InvestmentAnalytics with {len(self.properties):,} properties, "
            f"{len(self.economic)} economic quarters, dataset version {self.dataset_version}"
        )

    @property
    def properties(self) -> pd.DataFrame:
        return self._properties

    @properties.setter
    def properties(self, properties: pd.DataFrame) -> None:
        self._properties = properties.copy()
        self.dataset_version = self.compute_dataset_version(self._properties)

    @staticmethod
    def compute_dataset_version(properties: pd.DataFrame) -> str:
        """Short content hash of a property frame."""
        row_hashes = pd.util.hash_pandas_object(properties, index=False).to_numpy()
        digest = hashlib.sha1(row_hashes.tobytes())
        digest.update(",".join(map(str, properties.columns)).encode())
        return digest.hexdigest()[:12]

    def _cached(self, name: str, args: tuple, compute: Callable[[], Any]) -> Any:
        key = (name, args, self.dataset_version)
        if key in self._cache:
            self._cache.move_to_end(key)
            return self._cache[key]

        logger.debug(f"Cache miss for {name}{args}")
        value = self._cache[key] = compute()
        if len(self._cache) > self.max_cache_entries:
            self._cache.popitem(last=False)
        return value

    def clear_cache(self) -> None:
        self._cache.clear()

    @property
    def cache_size(self) -> int:
        return len(self._cache)

    # Quarter-level views

    def properties_for_quarter(self, quarter: str) -> pd.DataFrame:
        frame = self._cached(
            "properties_for_quarter", (quarter,),
            lambda: get_properties_for_quarter(
                self.properties, quarter, jitter=self.jitter, strict=self.settings.strict_quarters
            )
        )
        return frame.copy()

    def economic_snapshot(self, quarter: str) -> Optional[EconomicSnapshot]:
        return self.economic.get(quarter)

    def quarter_stats(self, quarter: str) -> QuarterStats:
        return self._cached(
            "quarter_stats", (quarter,),
            lambda: get_quarter_stats(
                self.properties, quarter, jitter=self.jitter, strict=self.settings.strict_quarters
            )
        )

    def market_trend(self) -> pd.DataFrame:
        return self._cached(
            "market_trend", (),
            lambda: get_market_trend(
                self.properties, self.economic.quarters,
                jitter=self.jitter, strict=self.settings.strict_quarters
            )
        ).copy()

    def property_price_trend(self, property_id: int) -> pd.DataFrame:
        return self._cached(
            "property_price_trend", (property_id,),
            lambda: get_property_price_trend(
                self.properties, property_id, self.economic.quarters,
                jitter=self.jitter, strict=self.settings.strict_quarters
            )
        ).copy()

    # Investment intelligence

    def scores(self, quarter: Optional[str] = None) -> List[PropertyScore]:
        quarter = quarter or self.settings.anchor_quarter
        return list(self._cached(
            "scores", (quarter,),
            lambda: get_all_property_scores(
                self.properties, self.economic, quarter,
                jitter=self.jitter, strict=self.settings.strict_quarters
            )
        ))

    def ranked_scores(
        self,
        quarter: Optional[str] = None,
        by: str = "score",
        ascending: bool = False,
        top: Optional[int] = None
    ) -> pd.DataFrame:
        return rank_scores(self.scores(quarter), by=by, ascending=ascending, top=top)

    def forecast(self, quarters_ahead: Optional[int] = None) -> List[ForecastPoint]:
        if quarters_ahead is None:
            quarters_ahead = self.settings.forecast_quarters_ahead
        anchor = self.settings.anchor_quarter
        return list(self._cached(
            "forecast", (quarters_ahead, anchor),
            lambda: generate_forecast(
                self.properties, quarters_ahead, anchor,
                quarters=self.economic.quarters,
                jitter=self.jitter, strict=self.settings.strict_quarters
            )
        ))

    def correlations(self) -> List[CorrelationResult]:
        return list(self._cached(
            "correlations", (),
            lambda: calculate_correlations(
                self.properties, self.economic, self.economic.quarters,
                jitter=self.jitter, strict=self.settings.strict_quarters
            )
        ))

    def market_cycle(self, quarter: Optional[str] = None) -> MarketCyclePhase:
        quarter = quarter or self.settings.anchor_quarter
        return determine_market_cycle(self.economic.get(quarter))

    def portfolio_summary(self, quarter: Optional[str] = None) -> PortfolioSummary:
        quarter = quarter or self.settings.anchor_quarter
        return self._cached(
            "portfolio_summary", (quarter,),
            lambda: get_portfolio_summary(
                self.properties, self.economic, quarter,
                jitter=self.jitter, projected_growth=self.settings.projected_growth,
                strict=self.settings.strict_quarters
            )
        )

    def stress_test(
        self,
        interest_rate_change: float = 0.0,
        vacancy_change: float = 0.0,
        rent_growth_change: float = 0.0,
        base_value: Optional[float] = None,
        quarter: Optional[str] = None
    ) -> StressScenario:
        """Stress the portfolio value in ``quarter`` (default anchor) unless ``base_value`` is given."""
        if base_value is None:
            base_value = self.portfolio_summary(quarter).total_value
        return calculate_stress_scenario(
            base_value, interest_rate_change, vacancy_change, rent_growth_change
        )

    # Map panels

    def visible_properties(self, bounds: Bounds, quarter: Optional[str] = None) -> pd.DataFrame:
        frame = self.properties if quarter is None else self.properties_for_quarter(quarter)
        return filter_visible_properties(frame, bounds)

    def metric_histogram(
        self,
        metric_key: str,
        bounds: Optional[Bounds] = None,
        quarter: Optional[str] = None,
        bin_count: int = 12
    ) -> pd.DataFrame:
        frame = self.properties if quarter is None else self.properties_for_quarter(quarter)
        if bounds is not None:
            frame = filter_visible_properties(frame, bounds)
        return build_histogram(frame, metric_key, bin_count=bin_count)
