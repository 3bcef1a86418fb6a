"""
Descriptive statistics module.

Computes the full statistics snapshot for one numeric column: central
tendency, dispersion, order statistics, distribution shape and outlier
counts. Degenerate input returns 0 rather than raising.

Public API:
    load(values)              - Immutable snapshot (values + sorted copy)
    describe(values)          - All statistics at once
    percentile(values, p)     - Linear-interpolation percentile (0-100)
    z_scores(values)          - Standardized values
    count_outliers(values, t) - Count of |z| > t
    count_outliers_iqr(values)- Count outside the Tukey fences
    mode(values)              - (value, frequency), smallest on ties
"""

from colstats.descriptive.design import SeriesDesign
from colstats.descriptive.solution import (
    StatisticsParams,
    StatisticsSolution,
    FULL_ANALYSIS_KEYS,
    interpret_skewness,
    interpret_kurtosis,
)
from colstats.descriptive.solvers import (
    load,
    describe,
    percentile,
    z_scores,
    count_outliers,
    count_outliers_iqr,
    mode,
)

__all__ = [
    "load",
    "describe",
    "percentile",
    "z_scores",
    "count_outliers",
    "count_outliers_iqr",
    "mode",
    "SeriesDesign",
    "StatisticsParams",
    "StatisticsSolution",
    "FULL_ANALYSIS_KEYS",
    "interpret_skewness",
    "interpret_kurtosis",
]
