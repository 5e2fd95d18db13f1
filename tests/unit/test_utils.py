"""Unit tests for shared helpers."""

import logging

import pytest
import numpy as np
import pandas as pd

from realty_analytics.utils import (
    DataValidationError,
    RealtyAnalyticsError,
    UnknownQuarterError,
    clip_score,
    round_half_up,
    setup_logging
)


class TestRoundHalfUp:

    def test_scalar_halves_round_up(self):
        assert round_half_up(2.5) == 3.0
        assert round_half_up(-2.5) == -2.0
        assert round_half_up(0.25, 1) == 0.3

    def test_array(self):
        result = round_half_up(np.array([1.25, 1.35, 2.0]), 1)
        assert isinstance(result, np.ndarray)
        np.testing.assert_allclose(result, [1.3, 1.4, 2.0])

    def test_series_keeps_index(self):
        series = pd.Series([0.5, 1.5], index=["a", "b"], name="x")
        result = round_half_up(series)
        assert result.tolist() == [1.0, 2.0]
        assert result.index.tolist() == ["a", "b"]
        assert result.name == "x"


class TestClipScore:

    def test_scalar(self):
        assert clip_score(-4.0) == 0.0
        assert clip_score(140.0) == 100.0
        assert clip_score(55.5) == 55.5

    def test_array(self):
        assert clip_score(np.array([-1.0, 50.0, 101.0])).tolist() == [0.0, 50.0, 100.0]


class TestExceptions:

    def test_hierarchy(self):
        assert issubclass(UnknownQuarterError, RealtyAnalyticsError)
        assert issubclass(UnknownQuarterError, KeyError)
        assert issubclass(DataValidationError, RealtyAnalyticsError)
        assert issubclass(DataValidationError, ValueError)


class TestSetupLogging:

    def test_level_by_name(self):
        logger = setup_logging("realty_analytics.test", level="debug")
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1

    def test_log_file(self, temp_dir):
        path = temp_dir / "run.log"
        logger = setup_logging("realty_analytics.test_file", log_file=str(path))
        logger.info("hello")
        for handler in logger.handlers:
            handler.flush()
            handler.close()
        logger.handlers = []

        assert "hello" in path.read_text()

    def test_reconfigure_replaces_handlers(self):
        setup_logging("realty_analytics.test_again")
        logger = setup_logging("realty_analytics.test_again", level=logging.WARNING)
        assert len(logger.handlers) == 1
        assert logger.level == logging.WARNING
