"""
Tests for moment-based statistics: means, dispersion, shape, z-scores.

Shape statistics are cross-checked against scipy.stats with bias=False.
"""

import math

import numpy as np
import pytest
from scipy import stats

from colstats.descriptive import _moments, count_outliers, z_scores


# ═══════════════════════════════════════════════════════════════════════
# Means
# ═══════════════════════════════════════════════════════════════════════

class TestMeans:

    def test_mean_and_total(self):
        x = np.array([2.0, 4.0, 4.0, 4.0, 5.0, 5.0, 7.0, 9.0])
        assert _moments.total(x) == 40.0
        assert _moments.mean(x) == 5.0

    def test_geometric_mean(self):
        assert _moments.geometric_mean(np.array([1.0, 4.0, 16.0])) == pytest.approx(4.0)

    def test_geometric_mean_matches_scipy(self, rng):
        x = rng.uniform(0.5, 20.0, size=50)
        assert _moments.geometric_mean(x) == pytest.approx(stats.gmean(x), rel=1e-12)

    def test_geometric_mean_ignores_nonpositive(self):
        x = np.array([-1.0, 0.0, 1.0, 4.0, 16.0])
        assert _moments.geometric_mean(x) == pytest.approx(4.0)

    def test_geometric_mean_no_positive_values(self):
        assert _moments.geometric_mean(np.array([-2.0, 0.0])) == 0.0

    def test_harmonic_mean(self):
        assert _moments.harmonic_mean(np.array([1.0, 2.0, 4.0])) == pytest.approx(3 / 1.75)

    def test_harmonic_mean_ignores_zero(self):
        assert _moments.harmonic_mean(np.array([0.0, 1.0, 2.0, 4.0])) == pytest.approx(3 / 1.75)

    def test_harmonic_mean_reciprocals_cancel(self):
        assert _moments.harmonic_mean(np.array([-1.0, 1.0])) == 0.0

    def test_empty(self):
        x = np.array([])
        assert _moments.total(x) == 0.0
        assert _moments.mean(x) == 0.0
        assert _moments.geometric_mean(x) == 0.0
        assert _moments.harmonic_mean(x) == 0.0


# ═══════════════════════════════════════════════════════════════════════
# Dispersion
# ═══════════════════════════════════════════════════════════════════════

class TestDispersion:

    def test_bessel_correction(self):
        """variance([1,2,3]) is 1.0 (n-1 denominator), not 2/3."""
        x = np.array([1.0, 2.0, 3.0])
        assert _moments.sample_variance(x) == pytest.approx(1.0)
        assert _moments.population_variance(x) == pytest.approx(2.0 / 3.0)

    def test_matches_numpy(self, rng):
        x = rng.standard_normal(200)
        assert _moments.sample_variance(x) == pytest.approx(np.var(x, ddof=1), rel=1e-12)
        assert _moments.population_sd(x) == pytest.approx(np.std(x), rel=1e-12)

    def test_single_value(self):
        x = np.array([5.0])
        assert _moments.sample_variance(x) == 0.0
        assert _moments.sample_sd(x) == 0.0
        assert _moments.population_variance(x) == 0.0
        assert _moments.standard_error(x) == 0.0

    def test_standard_error(self):
        x = np.array([2.0, 4.0, 4.0, 4.0, 5.0, 5.0, 7.0, 9.0])
        expected = math.sqrt(32.0 / 7.0) / math.sqrt(8)
        assert _moments.standard_error(x) == pytest.approx(expected)

    def test_coefficient_of_variation(self):
        x = np.array([2.0, 4.0, 4.0, 4.0, 5.0, 5.0, 7.0, 9.0])
        expected = math.sqrt(32.0 / 7.0) / 5.0 * 100.0
        assert _moments.coefficient_of_variation(x) == pytest.approx(expected)

    def test_coefficient_of_variation_uses_abs_mean(self):
        x = np.array([-2.0, -4.0, -6.0])
        assert _moments.coefficient_of_variation(x) == pytest.approx(50.0)

    def test_coefficient_of_variation_zero_mean(self):
        assert _moments.coefficient_of_variation(np.array([-1.0, 1.0])) == 0.0

    def test_mean_absolute_deviation(self):
        x = np.array([2.0, 4.0, 4.0, 4.0, 5.0, 5.0, 7.0, 9.0])
        assert _moments.sum_abs_deviations(x) == pytest.approx(12.0)
        assert _moments.mean_absolute_deviation(x) == pytest.approx(1.5)

    def test_sum_of_squares_and_rms(self):
        x = np.array([2.0, 4.0, 4.0, 4.0, 5.0, 5.0, 7.0, 9.0])
        assert _moments.sum_of_squares(x) == pytest.approx(232.0)
        assert _moments.root_mean_square(x) == pytest.approx(math.sqrt(29.0))


# ═══════════════════════════════════════════════════════════════════════
# Shape
# ═══════════════════════════════════════════════════════════════════════

class TestShape:

    def test_skewness_matches_scipy(self, rng):
        x = rng.exponential(size=100)
        expected = stats.skew(x, bias=False)
        assert _moments.skewness(x) == pytest.approx(expected, rel=1e-10)

    def test_kurtosis_matches_scipy(self, rng):
        x = rng.standard_t(df=5, size=100)
        expected = stats.kurtosis(x, fisher=True, bias=False)
        assert _moments.kurtosis(x) == pytest.approx(expected, rel=1e-10)

    def test_symmetric_data_zero_skew(self):
        x = np.array([1.0, 2.0, 3.0, 4.0, 5.0])
        assert _moments.skewness(x) == pytest.approx(0.0, abs=1e-12)

    def test_skewness_needs_three(self):
        assert _moments.skewness(np.array([1.0, 10.0])) == 0.0

    def test_kurtosis_needs_four(self):
        assert _moments.kurtosis(np.array([1.0, 2.0, 10.0])) == 0.0

    def test_constant_data(self):
        x = np.full(10, 3.0)
        assert _moments.skewness(x) == 0.0
        assert _moments.kurtosis(x) == 0.0


# ═══════════════════════════════════════════════════════════════════════
# Z-scores and outliers
# ═══════════════════════════════════════════════════════════════════════

class TestZScores:

    def test_z_scores(self):
        x = [1.0, 2.0, 3.0]
        np.testing.assert_allclose(z_scores(x), [-1.0, 0.0, 1.0])

    def test_load_order_preserved(self):
        np.testing.assert_allclose(z_scores([3.0, 1.0, 2.0]), [1.0, -1.0, 0.0])

    def test_constant_gives_zeros(self):
        np.testing.assert_array_equal(z_scores([4.0, 4.0, 4.0]), [0.0, 0.0, 0.0])

    def test_empty(self):
        assert z_scores([]).size == 0

    def test_count_outliers(self):
        x = [0.0] * 10 + [10.0]
        assert count_outliers(x) == 1
        assert count_outliers(x, threshold=5.0) == 0

    def test_threshold_is_strict(self):
        # z = +/-1 exactly for [1, 2, 3]
        assert count_outliers([1.0, 2.0, 3.0], threshold=1.0) == 0
        assert count_outliers([1.0, 2.0, 3.0], threshold=0.5) == 2

    def test_constant_has_no_outliers(self):
        assert count_outliers([7.0] * 5, threshold=0.0) == 0
