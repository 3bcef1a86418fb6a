"""
Moving-average kernels on a 1D float array.

Window kernels return an empty array unless 1 <= window <= n. They
produce n - window + 1 values, value i summarizing x[i : i + window].
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray


def _window_fits(n: int, window: int) -> bool:
    return n > 0 and 1 <= window <= n


def simple(x: NDArray, window: int) -> NDArray:
    """
    Simple moving average by running sum.

    The window sum is updated by subtracting the value leaving and adding
    the value entering, so the cost is O(n) regardless of window size.
    """
    n = x.size
    if not _window_fits(n, window):
        return np.empty(0, dtype=np.float64)

    size = n - window + 1
    out = np.empty(size, dtype=np.float64)

    window_sum = float(np.sum(x[:window]))
    out[0] = window_sum / window
    for i in range(1, size):
        window_sum = window_sum - x[i - 1] + x[i + window - 1]
        out[i] = window_sum / window
    return out


def weighted(x: NDArray, window: int) -> NDArray:
    """
    Linearly weighted moving average.

    Within each window the oldest value has weight 1 and the newest has
    weight ``window``; the weighted sum is divided by window(window+1)/2.
    """
    n = x.size
    if not _window_fits(n, window):
        return np.empty(0, dtype=np.float64)

    weights = np.arange(1, window + 1, dtype=np.float64)
    normalizer = window * (window + 1) / 2.0
    windows = np.lib.stride_tricks.sliding_window_view(x, window)
    return windows @ weights / normalizer


def exponential(x: NDArray, alpha: float) -> NDArray:
    """
    Exponential moving average seeded with the first value.

        out[0] = x[0]
        out[i] = alpha * x[i] + (1 - alpha) * out[i - 1]

    alpha must already be within [0, 1].
    """
    n = x.size
    out = np.empty(n, dtype=np.float64)
    if n == 0:
        return out
    out[0] = x[0]
    for i in range(1, n):
        out[i] = alpha * x[i] + (1.0 - alpha) * out[i - 1]
    return out
