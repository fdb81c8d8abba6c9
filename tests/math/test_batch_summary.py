"""Tests for halstead_metrics.math.summary module."""

import numpy as np
import pytest

from halstead_metrics.math.summary import BatchStatistics


class TestSummarize:
    """Tests for batch summary statistics."""

    def test_empty_is_none(self):
        assert BatchStatistics.summarize([]) is None

    def test_single_value(self):
        s = BatchStatistics.summarize([4.0])
        assert s.count == 1
        assert s.minimum == s.maximum == s.mean == s.median == s.p90 == 4.0

    def test_known_values(self):
        s = BatchStatistics.summarize([1.0, 2.0, 3.0, 4.0, 10.0])
        assert s.count == 5
        assert s.minimum == 1.0
        assert s.maximum == 10.0
        assert s.mean == pytest.approx(4.0)
        assert s.median == 3.0
        assert 4.0 < s.p90 <= 10.0

    def test_numpy_array_input(self):
        s = BatchStatistics.summarize(np.array([2.0, 4.0]))
        assert s.mean == pytest.approx(3.0)
        assert isinstance(s.mean, float)


class TestOutliers:
    """Tests for upper-fence outlier flags."""

    def test_small_batches_have_no_outliers(self):
        assert BatchStatistics.outliers([1.0, 100.0, 1000.0]) == [False, False, False]

    def test_single_high_value(self):
        flags = BatchStatistics.outliers([10.0, 11.0, 12.0, 13.0, 500.0])
        assert flags == [False, False, False, False, True]

    def test_low_values_not_flagged(self):
        """Only unusually high values are outliers."""
        flags = BatchStatistics.outliers([-500.0, 10.0, 11.0, 12.0, 13.0])
        assert not any(flags)

    def test_constant_values(self):
        assert not any(BatchStatistics.outliers([5.0] * 6))

    def test_multiplier(self):
        values = [10.0, 11.0, 12.0, 13.0, 17.0]
        # Q1=11, Q3=13: fence is 16 at 1.5 and 19 at 3.0
        assert BatchStatistics.outliers(values)[-1] is True
        assert BatchStatistics.outliers(values, multiplier=3.0)[-1] is False
