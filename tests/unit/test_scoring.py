"""Unit tests for composite investment scoring."""

import pytest
import pandas as pd

from realty_analytics.models.adjustment import get_properties_for_quarter
from realty_analytics.models.scoring import (
    SCORE_COLUMNS,
    PropertyScore,
    calculate_property_score,
    score_properties,
    get_all_property_scores,
    scores_to_frame,
    rank_scores
)
from realty_analytics.data.economic import EconomicTable


def adjusted_property(**overrides):
    prop = {
        'id': 1,
        'adjusted_price_per_unit': 50.0,
        'price_change': 20.0,
        'distance_to_mrt': 300.0,
        'convenience_stores': 5,
        'house_age': 12.0,
    }
    prop.update(overrides)
    return prop


class TestCalculatePropertyScore:

    def test_sub_scores(self):
        score = calculate_property_score(adjusted_property())

        assert score.property_id == 1
        assert score.yield_score == 99  # 100 - 50 / 50
        assert score.appreciation_score == 70  # 50 + 20
        assert score.volatility_score == 90  # 100 - 300 / 30
        assert score.location_score == 50  # 5 stores * 10
        assert score.affordability_score == 60  # age 5-15

    def test_weighted_total(self):
        # 99*.35 + 70*.35 + 90*.15 + 50*.10 + 60*.05 = 80.65
        assert calculate_property_score(adjusted_property()).score == 81

    def test_sub_scores_are_clamped(self):
        score = calculate_property_score(adjusted_property(
            adjusted_price_per_unit=6000.0,
            price_change=-75.0,
            distance_to_mrt=4000.0,
            convenience_stores=14
        ))
        assert score.yield_score == 0
        assert score.appreciation_score == 0
        assert score.volatility_score == 0
        assert score.location_score == 100

    def test_missing_price_change_counts_as_zero(self):
        prop = adjusted_property()
        del prop['price_change']
        assert calculate_property_score(prop).appreciation_score == 50

    def test_nan_price_change_counts_as_zero(self):
        assert calculate_property_score(adjusted_property(price_change=float('nan'))).appreciation_score == 50

    @pytest.mark.parametrize("age, expected", [(0.0, 80), (4.9, 80), (5.0, 60), (15.0, 40), (30.0, 20), (50.0, 20)])
    def test_affordability_bands(self, age, expected):
        assert calculate_property_score(adjusted_property(house_age=age)).affordability_score == expected

    def test_economic_context_does_not_change_score(self, economic_table):
        prop = adjusted_property()
        assert calculate_property_score(prop, economic_table.get("2026-Q1")) == calculate_property_score(prop)

    def test_accepts_series(self):
        assert calculate_property_score(pd.Series(adjusted_property())).score == 81


class TestScoreProperties:

    def test_bounds(self, properties, jitter):
        adjusted = get_properties_for_quarter(properties, "2026-Q1", jitter=jitter)
        scores = score_properties(adjusted)

        assert len(scores) == len(properties)
        assert list(scores.columns) == list(SCORE_COLUMNS)
        for col in SCORE_COLUMNS[1:]:
            assert scores[col].between(0, 100).all()

    def test_empty(self):
        scores = score_properties(pd.DataFrame())
        assert scores.empty
        assert list(scores.columns) == list(SCORE_COLUMNS)


class TestGetAllPropertyScores:

    def test_one_score_per_property(self, sample_properties, sample_economic_table, jitter):
        scores = get_all_property_scores(sample_properties, sample_economic_table, "2025-Q3", jitter=jitter)
        assert len(scores) == len(sample_properties)
        assert all(isinstance(s, PropertyScore) for s in scores)
        assert [s.property_id for s in scores] == sample_properties['id'].tolist()

    def test_no_economic_data(self, sample_properties, jitter):
        assert get_all_property_scores(sample_properties, EconomicTable({}), "2025-Q3", jitter=jitter) == []

    def test_quarter_without_snapshot(self, sample_properties, sample_economic_table, jitter):
        assert get_all_property_scores(sample_properties, sample_economic_table, "2030-Q1", jitter=jitter) == []


class TestRankScores:

    @pytest.fixture
    def scores(self):
        return [
            PropertyScore(1, 55, 90, 50, 40, 20, 60),
            PropertyScore(2, 72, 80, 70, 90, 50, 40),
            PropertyScore(3, 72, 70, 60, 95, 60, 80),
            PropertyScore(4, 30, 20, 40, 10, 0, 20),
        ]

    def test_descending_by_score_is_stable(self, scores):
        ranked = rank_scores(scores)
        assert ranked['property_id'].tolist() == [2, 3, 1, 4]

    def test_by_sub_score_ascending(self, scores):
        ranked = rank_scores(scores, by="volatility_score", ascending=True)
        assert ranked['property_id'].tolist() == [4, 1, 2, 3]

    def test_top(self, scores):
        assert len(rank_scores(scores, top=2)) == 2

    def test_unknown_column(self, scores):
        with pytest.raises(ValueError, match="Cannot sort"):
            rank_scores(scores, by="rent")

    def test_frame_conversion(self, scores):
        frame = scores_to_frame(scores)
        assert frame.shape == (4, len(SCORE_COLUMNS))
        assert scores_to_frame([]).empty
