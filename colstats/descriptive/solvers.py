"""
Solver dispatch for descriptive statistics.

Provides load() to snapshot a numeric sequence and describe() as the
comprehensive entry point, plus individual functions: percentile(),
z_scores(), count_outliers(), count_outliers_iqr(), mode().

All functions accept either raw values or a SeriesDesign from load(), so
a caller computing several things on one column sorts it only once.
"""

from __future__ import annotations

from typing import Iterable
import numpy as np
from numpy.typing import ArrayLike, NDArray

from colstats.core.defaults import DEFAULT_Z_THRESHOLD, REPORT_PERCENTILES
from colstats.core.validation import check_real
from colstats.descriptive import _moments, _order
from colstats.descriptive.design import SeriesDesign
from colstats.descriptive.solution import StatisticsSolution
from colstats.descriptive.backends.cpu import CPUStatisticsBackend


def _ensure_design(data: ArrayLike | SeriesDesign) -> SeriesDesign:
    """Convert raw values to SeriesDesign if needed."""
    if isinstance(data, SeriesDesign):
        return data
    return SeriesDesign.from_array(data)


def load(values: ArrayLike | None, *, name: str | None = None) -> SeriesDesign:
    """
    Snapshot a numeric sequence for analysis.

    Copies the values and a sorted copy. The returned object is immutable;
    loading other values returns a new snapshot and leaves this one intact.

    Parameters
    ----------
    values : array-like or None
        1D numbers. None or an empty sequence gives an n = 0 snapshot.
    name : str, optional
        Column name for reports.
    """
    return SeriesDesign.from_array(values, name=name)


def describe(
    data: ArrayLike | SeriesDesign,
    *,
    percentiles: Iterable[float] = REPORT_PERCENTILES,
    z_threshold: float = DEFAULT_Z_THRESHOLD,
) -> StatisticsSolution:
    """
    Compute the full battery of descriptive statistics.

    Computes: count, sum, min, max, range, mean, median, mode (+frequency),
    geometric and harmonic means, sample/population variance and standard
    deviation, standard error, coefficient of variation, mean absolute
    deviation, quartiles and IQR, extra percentiles, skewness, excess
    kurtosis, RMS, sum of squares, sum of absolute deviations, and
    outlier counts by IQR fences and by z-score.

    Parameters
    ----------
    data : array-like or SeriesDesign
        1D values.
    percentiles : iterable of float
        Extra percentiles on the 0-100 scale. Default (10, 90).
    z_threshold : float
        |z| cut-off for the z-score outlier count. Default 2.

    Returns
    -------
    StatisticsSolution with all statistics populated. Degenerate input
    (empty, too few values, zero spread) yields 0 for the affected
    statistics, never an exception.
    """
    design = _ensure_design(data)
    threshold = check_real(z_threshold, 'z_threshold')
    be = CPUStatisticsBackend()
    result = be.solve(design, percentiles=percentiles, z_threshold=threshold)
    return StatisticsSolution(_result=result, _design=design)


def percentile(data: ArrayLike | SeriesDesign, p: float) -> float:
    """
    Linear-interpolation percentile, p on the 0-100 scale.

    Returns 0 for empty data or p outside [0, 100].
    """
    design = _ensure_design(data)
    return _order.percentile(design.sorted_data, check_real(p, 'p'))


def z_scores(data: ArrayLike | SeriesDesign) -> NDArray[np.floating]:
    """(x - mean) / s per value, in load order; all zeros when s = 0."""
    design = _ensure_design(data)
    return _moments.z_scores(design.data)


def count_outliers(
    data: ArrayLike | SeriesDesign,
    threshold: float = DEFAULT_Z_THRESHOLD,
) -> int:
    """Number of values with |z| > threshold."""
    design = _ensure_design(data)
    return _moments.count_outliers_z(design.data, check_real(threshold, 'threshold'))


def count_outliers_iqr(data: ArrayLike | SeriesDesign) -> int:
    """Number of values outside [Q1 - 1.5 IQR, Q3 + 1.5 IQR]."""
    design = _ensure_design(data)
    return _order.count_outliers_iqr(design.sorted_data)


def mode(data: ArrayLike | SeriesDesign) -> tuple[float, int]:
    """(value, frequency) of the most frequent value, smallest on ties."""
    design = _ensure_design(data)
    return _order.mode(design.sorted_data)
