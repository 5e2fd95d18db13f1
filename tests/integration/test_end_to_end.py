"""End-to-end tests over the packaged dataset."""

import math

import pytest
import pandas as pd

from realty_analytics import InvestmentAnalytics, load_economic_data, load_properties
from realty_analytics.config import Settings
from realty_analytics.data import QUARTERS, save_results
from realty_analytics.geography import Bounds
from realty_analytics.models import forecast_to_frame


@pytest.fixture(scope="module")
def packaged_analytics():
    return InvestmentAnalytics(load_properties(), load_economic_data())


class TestFullPipeline:

    def test_time_slider_walk(self, packaged_analytics):
        """Every known quarter yields a full adjusted set and a quarter summary."""
        for quarter in QUARTERS:
            adjusted = packaged_analytics.properties_for_quarter(quarter)
            stats = packaged_analytics.quarter_stats(quarter)

            assert len(adjusted) == 414
            assert stats.total_properties == 414
            assert stats.min <= stats.median <= stats.max

    def test_dashboard_panels_agree(self, packaged_analytics):
        summary = packaged_analytics.portfolio_summary()
        scores = packaged_analytics.scores()
        adjusted = packaged_analytics.properties_for_quarter("2026-Q1")

        assert summary.property_count == len(scores) == len(adjusted)
        assert summary.total_value == pytest.approx(adjusted['adjusted_price_per_unit'].sum())
        mean_score = sum(s.score for s in scores) / len(scores)
        assert summary.avg_score == math.floor(mean_score + 0.5)

    def test_forecast_continues_trend(self, packaged_analytics):
        points = packaged_analytics.forecast()
        history = [p for p in points if not p.is_forecast]
        projected = [p for p in points if p.is_forecast]

        assert len(history) == 25
        assert len(projected) == 8
        assert [p.quarter for p in history] == list(QUARTERS)
        # First projected step repeats the last average, rounded to a whole number
        assert abs(projected[0].predicted_price - history[-1].predicted_price) <= 0.5

        widths = [p.interval_width for p in projected]
        assert widths == sorted(widths)

    def test_market_trend_matches_forecast_history(self, packaged_analytics):
        trend = packaged_analytics.market_trend()
        history = [p for p in packaged_analytics.forecast() if not p.is_forecast]
        for (_, row), point in zip(trend.iterrows(), history):
            assert row['avg_price'] == pytest.approx(point.predicted_price, abs=0.051)

    def test_map_viewport_flow(self, packaged_analytics):
        props = packaged_analytics.properties
        bounds = Bounds(
            props['latitude'].quantile(0.25), props['longitude'].quantile(0.25),
            props['latitude'].quantile(0.75), props['longitude'].quantile(0.75)
        )
        visible = packaged_analytics.visible_properties(bounds, quarter="2025-Q1")
        hist = packaged_analytics.metric_histogram('distance_to_mrt', bounds=bounds, quarter="2025-Q1")

        assert 0 < len(visible) < len(props)
        assert hist['count'].sum() == len(visible)

    def test_other_seed_changes_prices_only_slightly(self):
        props, economic = load_properties(), load_economic_data()
        a = InvestmentAnalytics(props, economic, Settings(jitter_seed=1))
        b = InvestmentAnalytics(props, economic, Settings(jitter_seed=2))

        avg_a = a.quarter_stats("2026-Q1").avg
        avg_b = b.quarter_stats("2026-Q1").avg
        assert avg_a != avg_b
        assert avg_a == pytest.approx(avg_b, rel=0.02)

    def test_reports_written(self, packaged_analytics, temp_dir):
        save_results(forecast_to_frame(packaged_analytics.forecast()), temp_dir / "forecast.csv")
        save_results(packaged_analytics.ranked_scores(top=10), temp_dir / "scores.csv")

        assert len(pd.read_csv(temp_dir / "forecast.csv")) == 33
        assert len(pd.read_csv(temp_dir / "scores.csv")) == 10
