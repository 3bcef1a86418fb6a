"""
Order statistics on an ascending-sorted 1D array.

Percentiles use linear interpolation between closest ranks, i.e. the
position of percentile p in a sample of n is

    h = p / 100 * (n - 1)

with the result sorted[floor(h)] + frac(h) * (sorted[ceil(h)] - sorted[floor(h)]).
This is R's quantile type 7 (numpy's default 'linear' method) on a
0-100 scale.
"""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import NDArray

from colstats.core.defaults import IQR_FENCE


def minimum(s: NDArray) -> float:
    return float(s[0]) if s.size else 0.0


def maximum(s: NDArray) -> float:
    return float(s[-1]) if s.size else 0.0


def value_range(s: NDArray) -> float:
    if s.size == 0:
        return 0.0
    return float(s[-1] - s[0])


def median(s: NDArray) -> float:
    n = s.size
    if n == 0:
        return 0.0
    mid = n // 2
    if n % 2 == 0:
        return float((s[mid - 1] + s[mid]) / 2.0)
    return float(s[mid])


def percentile(s: NDArray, p: float) -> float:
    """
    Linear-interpolation percentile.

    Parameters
    ----------
    s : NDArray
        Sorted values.
    p : float
        Percentile on the 0-100 scale. Outside [0, 100] (or NaN) gives 0.
    """
    n = s.size
    if n == 0:
        return 0.0
    if not (0.0 <= p <= 100.0):
        return 0.0

    position = (p / 100.0) * (n - 1)
    lower = int(math.floor(position))
    upper = int(math.ceil(position))

    if lower == upper:
        return float(s[lower])

    fraction = position - lower
    return float(s[lower] + fraction * (s[upper] - s[lower]))


def quartiles(s: NDArray) -> tuple[float, float, float]:
    """(Q1, Q2, Q3) with Q2 the median."""
    return percentile(s, 25.0), median(s), percentile(s, 75.0)


def interquartile_range(s: NDArray) -> float:
    return percentile(s, 75.0) - percentile(s, 25.0)


def mode(s: NDArray) -> tuple[float, int]:
    """
    Most frequent value and its count.

    Ties go to the smallest value: counts are taken over the sorted unique
    values and argmax returns the first maximum.

    Returns
    -------
    (value, frequency), (0.0, 0) when empty.
    """
    if s.size == 0:
        return 0.0, 0
    values, counts = np.unique(s, return_counts=True)
    best = int(np.argmax(counts))
    return float(values[best]), int(counts[best])


def iqr_fences(s: NDArray) -> tuple[float, float]:
    """Tukey fences (Q1 - 1.5 IQR, Q3 + 1.5 IQR)."""
    q1 = percentile(s, 25.0)
    q3 = percentile(s, 75.0)
    iqr = q3 - q1
    return q1 - IQR_FENCE * iqr, q3 + IQR_FENCE * iqr


def count_outliers_iqr(s: NDArray) -> int:
    """Number of values outside the Tukey fences."""
    if s.size == 0:
        return 0
    lower, upper = iqr_fences(s)
    return int(np.count_nonzero((s < lower) | (s > upper)))
