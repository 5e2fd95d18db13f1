"""Unit tests for portfolio KPIs."""

import pytest

from realty_analytics.aggregation.portfolio import classify_market_risk, get_portfolio_summary
from realty_analytics.data.economic import EconomicTable
from realty_analytics.models.adjustment import get_properties_for_quarter
from realty_analytics.models.scoring import score_properties


class TestClassifyMarketRisk:

    @pytest.mark.parametrize("score, risk", [(85, "Low"), (70.5, "Low"), (70, "Medium"), (51, "Medium"), (50, "High"), (0, "High")])
    def test_thresholds(self, score, risk):
        assert classify_market_risk(score) == risk


class TestPortfolioSummary:

    def test_tiers_partition_properties(self, properties, economic_table, jitter):
        summary = get_portfolio_summary(properties, economic_table, "2026-Q1", jitter=jitter)

        assert summary.property_count == 414
        assert summary.high_value_assets + summary.medium_value_assets + summary.low_value_assets == 414
        assert 0 <= summary.avg_score <= 100
        assert summary.projected_growth == 8.5
        assert summary.market_risk in ("Low", "Medium", "High")

    def test_tier_counts(self, sample_properties, sample_economic_table, jitter):
        summary = get_portfolio_summary(sample_properties, sample_economic_table, "2025-Q1", jitter=jitter)
        scores = score_properties(
            get_properties_for_quarter(sample_properties, "2025-Q1", jitter=jitter)
        )['score']

        assert summary.high_value_assets == (scores >= 70).sum()
        assert summary.low_value_assets == (scores < 40).sum()

    def test_total_value(self, sample_properties, sample_economic_table, jitter):
        summary = get_portfolio_summary(sample_properties, sample_economic_table, "2025-Q1", jitter=jitter)
        adjusted = get_properties_for_quarter(sample_properties, "2025-Q1", jitter=jitter)
        assert summary.total_value == pytest.approx(adjusted['adjusted_price_per_unit'].sum())

    def test_without_economic_data(self, sample_properties, jitter):
        summary = get_portfolio_summary(sample_properties, EconomicTable({}), "2025-Q1", jitter=jitter)

        assert summary.total_value > 0
        assert summary.avg_score == 0
        assert summary.high_value_assets == summary.medium_value_assets == summary.low_value_assets == 0
        assert summary.market_risk == "High"

    def test_custom_growth(self, sample_properties, sample_economic_table, jitter):
        summary = get_portfolio_summary(
            sample_properties, sample_economic_table, "2025-Q1", jitter=jitter, projected_growth=4.0
        )
        assert summary.to_dict()['projected_growth'] == 4.0
