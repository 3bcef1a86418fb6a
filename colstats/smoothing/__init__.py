"""
Moving-average module.

Transforms one loaded numeric column into simple, four-point, weighted
and exponential moving averages, and lines the results up against the
original values for comparison.

Public API:
    moving_average(values, window)          - Simple moving average
    four_point_moving_average(values)       - SMA with window 4, offset 1
    weighted_moving_average(values, window) - Linear weights 1..W
    exponential_moving_average(values, a)   - EMA, alpha default 0.3
    smooth(values, kind, ...)               - Dispatch by kind name
    alignment_offset(kind, window)          - Display alignment rule
"""

from colstats.smoothing.solution import (
    ComparisonRow,
    MovingAverageParams,
    MovingAverageSolution,
    alignment_offset,
)
from colstats.smoothing.solvers import (
    moving_average,
    four_point_moving_average,
    weighted_moving_average,
    exponential_moving_average,
    smooth,
)

__all__ = [
    "moving_average",
    "four_point_moving_average",
    "weighted_moving_average",
    "exponential_moving_average",
    "smooth",
    "alignment_offset",
    "ComparisonRow",
    "MovingAverageParams",
    "MovingAverageSolution",
]
