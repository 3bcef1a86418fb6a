"""
Solver dispatch for moving averages.

Provides moving_average(), four_point_moving_average(),
weighted_moving_average() and exponential_moving_average(), plus
smooth() which dispatches on a kind string.

Out-of-range windows are not errors: they produce an empty result with a
warning recorded on the solution. An alpha outside [0, 1] is replaced by
the default 0.3, also recorded as a warning.
"""

from __future__ import annotations

import math

from numpy.typing import ArrayLike

from colstats.core.compute.timing import Timer
from colstats.core.defaults import DEFAULT_EMA_ALPHA, FOUR_POINT_WINDOW
from colstats.core.exceptions import ValidationError
from colstats.core.result import Result
from colstats.core.validation import check_integer, check_real
from colstats.descriptive.design import SeriesDesign
from colstats.smoothing import _kernels
from colstats.smoothing.solution import (
    MAKind,
    MovingAverageParams,
    MovingAverageSolution,
    alignment_offset,
)


def _ensure_design(data: ArrayLike | SeriesDesign) -> SeriesDesign:
    """Convert raw values to SeriesDesign if needed."""
    if isinstance(data, SeriesDesign):
        return data
    return SeriesDesign.from_array(data)


def _windowed(
    data: ArrayLike | SeriesDesign,
    window: int,
    kind: MAKind,
) -> MovingAverageSolution:
    design = _ensure_design(data)
    window = check_integer(window, 'window')

    timer = Timer()
    timer.start()
    warnings_list: list[str] = []

    if not 1 <= window <= design.n:
        warnings_list.append(
            f"window={window} outside [1, {design.n}]; no values produced"
        )

    with timer.section(kind):
        if kind == 'wma':
            values = _kernels.weighted(design.data, window)
        else:
            values = _kernels.simple(design.data, window)

    timer.stop()

    params = MovingAverageParams(
        values=values,
        kind=kind,
        window=window,
        alpha=None,
        offset=alignment_offset(kind, window),
    )
    result = Result(
        params=params,
        info={'method': kind, 'n': design.n},
        timing=timer.result(),
        backend_name='cpu_smoothing',
        warnings=tuple(warnings_list),
    )
    return MovingAverageSolution(_result=result, _design=design)


def moving_average(
    data: ArrayLike | SeriesDesign,
    window: int,
) -> MovingAverageSolution:
    """
    Simple moving average.

    Parameters
    ----------
    data : array-like or SeriesDesign
        1D values.
    window : int
        Window size W. Must satisfy 1 <= W <= n to produce values.

    Returns
    -------
    MovingAverageSolution with n - W + 1 values, value i the mean of
    data[i : i + W]; empty when W is out of range. Offset W // 2.
    """
    return _windowed(data, window, 'sma')


def four_point_moving_average(data: ArrayLike | SeriesDesign) -> MovingAverageSolution:
    """Simple moving average over 4 values, aligned with offset 1."""
    return _windowed(data, FOUR_POINT_WINDOW, 'four_point')


def weighted_moving_average(
    data: ArrayLike | SeriesDesign,
    window: int,
) -> MovingAverageSolution:
    """
    Linearly weighted moving average.

    Weights 1..W from oldest to newest in each window, normalized by
    W(W+1)/2. Same length and range rules as moving_average().
    """
    return _windowed(data, window, 'wma')


def exponential_moving_average(
    data: ArrayLike | SeriesDesign,
    alpha: float = DEFAULT_EMA_ALPHA,
) -> MovingAverageSolution:
    """
    Exponential moving average.

    Parameters
    ----------
    data : array-like or SeriesDesign
        1D values.
    alpha : float
        Smoothing factor in [0, 1]. Anything else (including NaN) is
        replaced by 0.3.

    Returns
    -------
    MovingAverageSolution with n values: ema[0] = data[0] and
    ema[i] = alpha * data[i] + (1 - alpha) * ema[i-1]. Offset 0.
    """
    design = _ensure_design(data)
    requested = check_real(alpha, 'alpha')

    timer = Timer()
    timer.start()
    warnings_list: list[str] = []

    used = requested
    if math.isnan(requested) or not 0.0 <= requested <= 1.0:
        used = DEFAULT_EMA_ALPHA
        warnings_list.append(
            f"alpha={requested!r} outside [0, 1]; using {DEFAULT_EMA_ALPHA}"
        )

    with timer.section('ema'):
        values = _kernels.exponential(design.data, used)

    timer.stop()

    params = MovingAverageParams(
        values=values,
        kind='ema',
        window=None,
        alpha=used,
        offset=alignment_offset('ema'),
    )
    result = Result(
        params=params,
        info={'method': 'ema', 'n': design.n, 'requested_alpha': requested},
        timing=timer.result(),
        backend_name='cpu_smoothing',
        warnings=tuple(warnings_list),
    )
    return MovingAverageSolution(_result=result, _design=design)


def smooth(
    data: ArrayLike | SeriesDesign,
    kind: MAKind,
    *,
    window: int | None = None,
    alpha: float = DEFAULT_EMA_ALPHA,
) -> MovingAverageSolution:
    """
    Dispatch to one moving average by name.

    Parameters
    ----------
    kind : str
        'sma', 'wma' (window required), 'four_point', or 'ema'.
    """
    if kind == 'ema':
        return exponential_moving_average(data, alpha)
    if kind == 'four_point':
        return four_point_moving_average(data)
    if kind in ('sma', 'wma'):
        if window is None:
            raise ValidationError(f"{kind}: window is required")
        if kind == 'sma':
            return moving_average(data, window)
        return weighted_moving_average(data, window)
    raise ValidationError(
        f"Unknown moving-average kind: {kind!r}. "
        f"Must be 'sma', 'wma', 'four_point' or 'ema'."
    )
