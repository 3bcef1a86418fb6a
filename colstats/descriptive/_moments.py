"""
Moment-based statistics on an unsorted 1D array.

Every function returns 0 for an empty array and for sample sizes below
the statistic's minimum (MIN_N_VARIANCE, MIN_N_SKEWNESS, MIN_N_KURTOSIS)
instead of raising or returning NaN.

Shape statistics follow the bias-adjusted definitions:

    skewness = n / ((n-1)(n-2)) * sum(z^3)
    kurtosis = n(n+1) / ((n-1)(n-2)(n-3)) * sum(z^4) - 3(n-1)^2 / ((n-2)(n-3))

with z = (x - mean) / s and s the sample standard deviation. These equal
scipy.stats.skew(bias=False) and scipy.stats.kurtosis(bias=False).
"""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import NDArray

from colstats.core.defaults import MIN_N_VARIANCE, MIN_N_SKEWNESS, MIN_N_KURTOSIS


def total(x: NDArray) -> float:
    return float(np.sum(x)) if x.size else 0.0


def mean(x: NDArray) -> float:
    if x.size == 0:
        return 0.0
    return total(x) / x.size


def geometric_mean(x: NDArray) -> float:
    """exp(mean(log x)) over the strictly positive values only."""
    positive = x[x > 0]
    if positive.size == 0:
        return 0.0
    return float(np.exp(np.mean(np.log(positive))))


def harmonic_mean(x: NDArray) -> float:
    """count / sum(1/x) over the nonzero values only (negatives included)."""
    nonzero = x[x != 0]
    if nonzero.size == 0:
        return 0.0
    reciprocal_sum = float(np.sum(1.0 / nonzero))
    if reciprocal_sum == 0:
        return 0.0
    return nonzero.size / reciprocal_sum


def _squared_deviations(x: NDArray) -> float:
    return float(np.sum((x - mean(x)) ** 2))


def sample_variance(x: NDArray) -> float:
    """Bessel-corrected (n-1) variance; 0 when n < 2."""
    n = x.size
    if n < MIN_N_VARIANCE:
        return 0.0
    return _squared_deviations(x) / (n - 1)


def population_variance(x: NDArray) -> float:
    n = x.size
    if n == 0:
        return 0.0
    return _squared_deviations(x) / n


def sample_sd(x: NDArray) -> float:
    return math.sqrt(sample_variance(x))


def population_sd(x: NDArray) -> float:
    return math.sqrt(population_variance(x))


def standard_error(x: NDArray) -> float:
    n = x.size
    if n == 0:
        return 0.0
    return sample_sd(x) / math.sqrt(n)


def coefficient_of_variation(x: NDArray) -> float:
    """100 * s / |mean|, 0 when the mean is 0."""
    m = mean(x)
    if m == 0:
        return 0.0
    return sample_sd(x) / abs(m) * 100.0


def sum_abs_deviations(x: NDArray) -> float:
    if x.size == 0:
        return 0.0
    return float(np.sum(np.abs(x - mean(x))))


def mean_absolute_deviation(x: NDArray) -> float:
    if x.size == 0:
        return 0.0
    return sum_abs_deviations(x) / x.size


def _standardized(x: NDArray) -> NDArray | None:
    """(x - mean) / s, or None when s is 0."""
    s = sample_sd(x)
    if s == 0:
        return None
    return (x - mean(x)) / s


def skewness(x: NDArray) -> float:
    n = x.size
    if n < MIN_N_SKEWNESS:
        return 0.0
    z = _standardized(x)
    if z is None:
        return 0.0
    factor = n / ((n - 1.0) * (n - 2.0))
    return factor * float(np.sum(z ** 3))


def kurtosis(x: NDArray) -> float:
    """Excess kurtosis (normal = 0)."""
    n = x.size
    if n < MIN_N_KURTOSIS:
        return 0.0
    z = _standardized(x)
    if z is None:
        return 0.0
    n = float(n)
    factor1 = (n * (n + 1.0)) / ((n - 1.0) * (n - 2.0) * (n - 3.0))
    factor2 = (3.0 * (n - 1.0) ** 2) / ((n - 2.0) * (n - 3.0))
    return factor1 * float(np.sum(z ** 4)) - factor2


def z_scores(x: NDArray) -> NDArray:
    """Standardized values; all zeros when s is 0, empty when x is empty."""
    z = _standardized(x)
    if z is None:
        return np.zeros(x.size, dtype=np.float64)
    return z


def count_outliers_z(x: NDArray, threshold: float) -> int:
    """Number of values with |z| strictly greater than threshold."""
    return int(np.count_nonzero(np.abs(z_scores(x)) > threshold))


def sum_of_squares(x: NDArray) -> float:
    return float(np.sum(x * x)) if x.size else 0.0


def root_mean_square(x: NDArray) -> float:
    if x.size == 0:
        return 0.0
    return math.sqrt(sum_of_squares(x) / x.size)
