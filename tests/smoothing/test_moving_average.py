"""
Tests for moving averages and their alignment against the original values.
"""

import numpy as np
import pytest

from colstats.core.exceptions import ValidationError
from colstats.descriptive import load
from colstats.smoothing import (
    ComparisonRow,
    alignment_offset,
    exponential_moving_average,
    four_point_moving_average,
    moving_average,
    smooth,
    weighted_moving_average,
)


def naive_moving_average(x, window):
    """Direct per-window mean, for checking the running-sum kernel."""
    x = np.asarray(x, dtype=np.float64)
    return np.array([x[i:i + window].mean() for i in range(len(x) - window + 1)])


# ═══════════════════════════════════════════════════════════════════════
# Simple and four-point
# ═══════════════════════════════════════════════════════════════════════

class TestSimple:

    def test_values(self):
        result = moving_average([1.0, 2.0, 3.0, 4.0, 5.0], 3)
        np.testing.assert_allclose(result.values, [2.0, 3.0, 4.0])
        assert len(result) == 3

    def test_matches_naive(self, rng):
        x = rng.standard_normal(500) * 1000
        for window in (1, 2, 7, 50, 500):
            np.testing.assert_allclose(
                moving_average(x, window).values,
                naive_moving_average(x, window),
                rtol=1e-9, atol=1e-6,
            )

    def test_window_one_is_identity(self):
        np.testing.assert_allclose(moving_average([4.0, 1.0], 1).values, [4.0, 1.0])

    def test_window_equals_n(self):
        np.testing.assert_allclose(moving_average([1.0, 2.0, 6.0], 3).values, [3.0])

    @pytest.mark.parametrize("window", [0, -1, 6])
    def test_out_of_range_window_empty(self, window):
        result = moving_average([1.0, 2.0, 3.0, 4.0, 5.0], window)
        assert result.values.size == 0
        assert any("outside [1, 5]" in w for w in result.warnings)

    def test_empty_input(self):
        assert moving_average([], 3).values.size == 0

    def test_rejects_non_integer_window(self):
        with pytest.raises(ValidationError):
            moving_average([1.0, 2.0], 1.5)

    def test_four_point(self):
        result = four_point_moving_average([1.0, 2.0, 3.0, 4.0, 5.0, 6.0])
        np.testing.assert_allclose(result.values, [2.5, 3.5, 4.5])
        assert result.window == 4
        assert result.offset == 1

    def test_four_point_too_short(self):
        assert len(four_point_moving_average([1.0, 2.0, 3.0])) == 0


# ═══════════════════════════════════════════════════════════════════════
# Weighted
# ═══════════════════════════════════════════════════════════════════════

class TestWeighted:

    def test_weights_favor_newest(self):
        # (1*1 + 2*2 + 3*3) / 6
        result = weighted_moving_average([1.0, 2.0, 3.0], 3)
        np.testing.assert_allclose(result.values, [14.0 / 6.0])

    def test_sliding(self):
        result = weighted_moving_average([1.0, 2.0, 3.0, 4.0], 2)
        np.testing.assert_allclose(result.values, [5.0 / 3.0, 8.0 / 3.0, 11.0 / 3.0])

    def test_constant_series(self):
        result = weighted_moving_average([7.0] * 6, 4)
        np.testing.assert_allclose(result.values, [7.0, 7.0, 7.0])

    def test_out_of_range(self):
        assert len(weighted_moving_average([1.0], 2)) == 0


# ═══════════════════════════════════════════════════════════════════════
# Exponential
# ═══════════════════════════════════════════════════════════════════════

class TestExponential:

    def test_recurrence(self):
        result = exponential_moving_average([10.0, 20.0, 30.0], 0.5)
        np.testing.assert_allclose(result.values, [10.0, 15.0, 22.5])
        assert result.offset == 0

    def test_default_alpha(self):
        result = exponential_moving_average([10.0, 20.0])
        assert result.alpha == 0.3
        np.testing.assert_allclose(result.values, [10.0, 13.0])

    def test_alpha_bounds(self):
        x = [1.0, 5.0, 9.0]
        np.testing.assert_allclose(exponential_moving_average(x, 0.0).values, [1.0, 1.0, 1.0])
        np.testing.assert_allclose(exponential_moving_average(x, 1.0).values, x)

    @pytest.mark.parametrize("alpha", [-0.1, 1.5, float("nan")])
    def test_invalid_alpha_replaced(self, alpha):
        result = exponential_moving_average([10.0, 20.0], alpha)
        assert result.alpha == 0.3
        np.testing.assert_allclose(result.values, [10.0, 13.0])
        assert len(result.warnings) == 1
        assert "using 0.3" in result.warnings[0]

    def test_empty(self):
        assert len(exponential_moving_average([])) == 0

    def test_length_matches_input(self, rng):
        x = rng.standard_normal(40)
        assert len(exponential_moving_average(x, 0.2)) == 40


# ═══════════════════════════════════════════════════════════════════════
# Alignment and comparison
# ═══════════════════════════════════════════════════════════════════════

class TestAlignment:

    def test_offsets(self):
        assert alignment_offset('ema') == 0
        assert alignment_offset('four_point') == 1
        assert alignment_offset('sma', 5) == 2
        assert alignment_offset('wma', 4) == 2
        assert alignment_offset('sma', 1) == 0

    def test_offset_needs_window(self):
        with pytest.raises(ValidationError):
            alignment_offset('sma')

    def test_unknown_kind(self):
        with pytest.raises(ValidationError):
            alignment_offset('median')

    def test_aligned_sma(self):
        result = moving_average([1.0, 2.0, 3.0, 4.0, 5.0], 3)
        np.testing.assert_allclose(result.aligned(), [np.nan, 2.0, 3.0, 4.0, np.nan])

    def test_aligned_four_point(self):
        result = four_point_moving_average([1.0, 2.0, 3.0, 4.0, 5.0])
        np.testing.assert_allclose(result.aligned(), [np.nan, 2.5, 3.5, np.nan, np.nan])

    def test_aligned_empty_result(self):
        result = moving_average([1.0, 2.0], 5)
        assert np.isnan(result.aligned()).all()

    def test_comparison_rows(self):
        result = moving_average([1.0, 2.0, 6.0], 3)
        rows = result.comparison()
        assert rows[0] == ComparisonRow(1, 1.0, None, None, None)
        assert rows[1].index == 2
        assert rows[1].average == 3.0
        assert rows[1].difference == -1.0
        assert rows[1].percent_change == pytest.approx(-100.0 / 3.0)
        assert rows[2].average is None

    def test_comparison_zero_average(self):
        result = exponential_moving_average([0.0, 0.0], 0.5)
        assert result.comparison()[0].percent_change is None
        assert result.comparison()[0].difference == 0.0

    def test_mean_difference_and_mae(self):
        result = moving_average([1.0, 5.0, 3.0, 7.0, 5.0], 3)
        # averages 3, 5, 5 at positions 1..3; differences 2, -2, 2
        assert result.mean_difference == pytest.approx(2.0 / 3.0)
        assert result.mean_absolute_error == pytest.approx(2.0)

    def test_mae_without_values(self):
        result = moving_average([1.0], 3)
        assert result.mean_difference == 0.0
        assert result.mean_absolute_error == 0.0


# ═══════════════════════════════════════════════════════════════════════
# Dispatch and labels
# ═══════════════════════════════════════════════════════════════════════

class TestDispatch:

    def test_smooth_kinds(self):
        x = [1.0, 2.0, 3.0, 4.0, 5.0]
        assert smooth(x, 'sma', window=2).kind == 'sma'
        assert smooth(x, 'wma', window=2).kind == 'wma'
        assert smooth(x, 'four_point').kind == 'four_point'
        assert smooth(x, 'ema', alpha=0.5).alpha == 0.5

    def test_smooth_requires_window(self):
        with pytest.raises(ValidationError, match="window is required"):
            smooth([1.0, 2.0], 'sma')

    def test_smooth_unknown(self):
        with pytest.raises(ValidationError, match="Unknown moving-average kind"):
            smooth([1.0, 2.0], 'cma')

    def test_accepts_design(self):
        design = load([1.0, 2.0, 3.0])
        result = moving_average(design, 2)
        np.testing.assert_array_equal(result.original, design.data)

    def test_labels(self):
        x = [1.0, 2.0, 3.0, 4.0, 5.0]
        assert moving_average(x, 5).label() == "SMA (window=5)"
        assert weighted_moving_average(x, 3).label() == "WMA (window=3)"
        assert four_point_moving_average(x).label() == "4-Point MA (window=4)"
        assert exponential_moving_average(x).label() == "EMA (alpha=0.3)"

    def test_summary(self):
        text = moving_average([1.0, 5.0, 3.0, 7.0, 5.0], 3).summary()
        assert text == "SMA (window=3) | MA Values: 3 | Avg Diff: 0.666667 | MAE: 2"

    def test_summary_without_values(self):
        assert moving_average([1.0], 3).summary() == "SMA (window=3) | MA Values: 0"

    def test_metadata(self):
        result = moving_average([1.0, 2.0], 2)
        assert result.backend_name == "cpu_smoothing"
        assert result.info == {'method': 'sma', 'n': 2}
        assert "total_seconds" in result.timing
