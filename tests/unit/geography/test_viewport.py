"""Unit tests for map viewport bounds."""

import pytest
import pandas as pd

from realty_analytics.geography.viewport import Bounds, filter_visible_properties


class TestBounds:

    def test_contains_is_inclusive(self):
        bounds = Bounds(south=24.95, west=121.50, north=25.00, east=121.55)
        assert bounds.contains(24.95, 121.50)
        assert bounds.contains(25.00, 121.55)
        assert bounds.contains(24.97, 121.52)
        assert not bounds.contains(25.01, 121.52)
        assert not bounds.contains(24.97, 121.49)

    def test_invalid_edges(self):
        with pytest.raises(ValueError):
            Bounds(south=25.0, west=121.5, north=24.9, east=121.6)
        with pytest.raises(ValueError):
            Bounds(south=24.9, west=121.6, north=25.0, east=121.5)

    def test_from_points(self):
        bounds = Bounds.from_points([(24.96, 121.53), (24.99, 121.50), (24.94, 121.56)])
        assert bounds == Bounds(24.94, 121.50, 24.99, 121.56)
        assert bounds.center == pytest.approx((24.965, 121.53))

    def test_from_no_points(self):
        with pytest.raises(ValueError):
            Bounds.from_points([])

    def test_mask_matches_contains(self, properties):
        bounds = Bounds(24.96, 121.51, 24.99, 121.55)
        mask = bounds.mask(properties['latitude'], properties['longitude'])
        expected = [bounds.contains(lat, lon) for lat, lon in zip(properties['latitude'], properties['longitude'])]
        assert mask.tolist() == expected


class TestFilterVisibleProperties:

    @pytest.fixture
    def frame(self):
        return pd.DataFrame({
            'id': [1, 2, 3, 4],
            'latitude': [24.95, 24.98, 25.02, 24.97],
            'longitude': [121.50, 121.53, 121.53, 121.60],
        })

    def test_filter(self, frame):
        visible = filter_visible_properties(frame, Bounds(24.94, 121.49, 25.00, 121.55))
        assert visible['id'].tolist() == [1, 2]
        assert visible.index.tolist() == [0, 1]

    def test_nothing_visible(self, frame):
        assert filter_visible_properties(frame, Bounds(0.0, 0.0, 1.0, 1.0)).empty

    def test_whole_dataset_visible(self, properties):
        bounds = Bounds.from_points(zip(properties['latitude'], properties['longitude']))
        assert len(filter_visible_properties(properties, bounds)) == len(properties)
