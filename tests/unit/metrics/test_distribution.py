"""Unit tests for metric histograms and summaries."""

import pytest
import numpy as np
import pandas as pd

from realty_analytics.config import constants
from realty_analytics.metrics.distribution import HISTOGRAM_COLUMNS, build_histogram, summarize_metric


class TestSummarizeMetric:

    def test_even_count_median(self):
        df = pd.DataFrame({'sqft': [1000, 4000, 2000, 3000]})
        summary = summarize_metric(df, 'sqft')
        assert summary.median == 2500.0
        assert summary.avg == 2500.0
        assert (summary.min, summary.max) == (1000.0, 4000.0)

    def test_empty(self):
        summary = summarize_metric(pd.DataFrame(columns=['sqft']), 'sqft')
        assert (summary.min, summary.max, summary.avg, summary.median) == (0.0, 0.0, 0.0, 0.0)


class TestBuildHistogram:

    def test_counts_and_edges(self):
        df = pd.DataFrame({'sqft': np.arange(13, dtype=float)})
        hist = build_histogram(df, 'sqft', bin_count=4)

        assert list(hist.columns) == HISTOGRAM_COLUMNS
        assert hist['bin_min'].tolist() == [0.0, 3.0, 6.0, 9.0]
        assert hist['bin_max'].tolist() == [3.0, 6.0, 9.0, 12.0]
        # Maximum value lands in the last bin
        assert hist['count'].tolist() == [3, 3, 3, 4]

    def test_every_value_counted(self, properties):
        for metric_key in ('price_per_unit', 'distance_to_mrt', 'house_age'):
            hist = build_histogram(properties, metric_key)
            assert len(hist) == constants.DEFAULT_HISTOGRAM_BINS
            assert hist['count'].sum() == len(properties)

    def test_colors_follow_scheme(self, properties):
        ascending = build_histogram(properties, 'price_per_unit')
        assert ascending['color'].iloc[0] == constants.COLOR_LOW
        assert ascending['color'].iloc[-1] == constants.COLOR_HIGH

        descending = build_histogram(properties, 'house_age')
        assert descending['color'].iloc[0] == constants.COLOR_HIGH
        assert descending['color'].iloc[-1] == constants.COLOR_LOW

    def test_labels_use_metric_format(self):
        df = pd.DataFrame({'price_per_unit': [10.0, 20.0]})
        hist = build_histogram(df, 'price_per_unit', bin_count=2)
        assert hist['label'].tolist() == ["$10.0", "$15.0"]

    def test_unknown_metric_label(self):
        hist = build_histogram(pd.DataFrame({'score': [1.0, 2.0]}), 'score', bin_count=1)
        assert hist['label'].tolist() == ["1.0"]
        assert hist['count'].tolist() == [2]

    def test_constant_values(self):
        hist = build_histogram(pd.DataFrame({'sqft': [1500.0] * 5}), 'sqft', bin_count=3)
        assert hist['count'].tolist() == [5, 0, 0]

    def test_fixed_range(self):
        df = pd.DataFrame({'sqft': [5.0, 15.0, 50.0]})
        hist = build_histogram(df, 'sqft', bin_count=2, value_range=(0.0, 20.0))
        assert hist['count'].tolist() == [1, 1]

    def test_empty(self):
        hist = build_histogram(pd.DataFrame(columns=['sqft']), 'sqft')
        assert hist.empty
        assert list(hist.columns) == HISTOGRAM_COLUMNS

    def test_invalid_bin_count(self, properties):
        with pytest.raises(ValueError):
            build_histogram(properties, 'sqft', bin_count=0)

    def test_reversed_range(self, properties):
        with pytest.raises(ValueError, match="reversed"):
            build_histogram(properties, 'sqft', value_range=(2000.0, 500.0))
        with pytest.raises(ValueError):
            build_histogram(properties.iloc[0:0], 'sqft', value_range=(1.0, 0.0))
