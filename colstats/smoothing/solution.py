"""
Moving-average solution types.

Contains the parameter payload, the alignment rule that maps moving-
average values back onto original positions, and the user-facing solution
with the original-versus-average comparison.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal, NamedTuple, TYPE_CHECKING
import numpy as np
from numpy.typing import NDArray

from colstats.core.defaults import FOUR_POINT_OFFSET
from colstats.core.exceptions import ValidationError
from colstats.core.result import Result

if TYPE_CHECKING:
    from colstats.descriptive.design import SeriesDesign


MAKind = Literal['sma', 'four_point', 'wma', 'ema']

_LABELS = {
    'sma': 'SMA',
    'four_point': '4-Point MA',
    'wma': 'WMA',
    'ema': 'EMA',
}


def alignment_offset(kind: MAKind, window: int | None = None) -> int:
    """
    Original index minus moving-average index for one kind of average.

    EMA values line up one-to-one (offset 0). SMA and WMA value j belongs
    to original position j + window // 2. The four-point average is fixed
    at offset 1, not 4 // 2.
    """
    if kind == 'ema':
        return 0
    if kind == 'four_point':
        return FOUR_POINT_OFFSET
    if kind in ('sma', 'wma'):
        if window is None:
            raise ValidationError(f"{kind}: window is required for alignment")
        return window // 2
    raise ValidationError(
        f"Unknown moving-average kind: {kind!r}. "
        f"Must be one of {sorted(_LABELS)}."
    )


class ComparisonRow(NamedTuple):
    """One original value against its aligned moving-average value."""
    index: int
    original: float
    average: float | None
    difference: float | None
    percent_change: float | None


@dataclass(frozen=True)
class MovingAverageParams:
    """Parameter payload for one moving-average transform."""
    values: NDArray[np.floating[Any]]
    kind: MAKind
    window: int | None
    alpha: float | None
    offset: int


@dataclass
class MovingAverageSolution:
    """
    User-facing moving-average result.

    Wraps Result[MovingAverageParams]; the design gives access to the
    original values for alignment and comparison.
    """
    _result: Result[MovingAverageParams]
    _design: 'SeriesDesign'

    @property
    def values(self) -> NDArray[np.floating[Any]]:
        """Moving-average values (empty when the window did not fit)."""
        return self._result.params.values

    @property
    def kind(self) -> MAKind:
        return self._result.params.kind

    @property
    def window(self) -> int | None:
        return self._result.params.window

    @property
    def alpha(self) -> float | None:
        """Smoothing factor actually used (EMA only)."""
        return self._result.params.alpha

    @property
    def offset(self) -> int:
        return self._result.params.offset

    @property
    def original(self) -> NDArray[np.floating[Any]]:
        return self._design.data

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def __len__(self) -> int:
        return len(self.values)

    def label(self) -> str:
        """E.g. 'SMA (window=5)' or 'EMA (alpha=0.3)'."""
        name = _LABELS[self.kind]
        if self.kind == 'ema':
            return f"{name} (alpha={self.alpha:g})"
        return f"{name} (window={self.window})"

    def aligned(self) -> NDArray[np.floating[Any]]:
        """
        Moving-average values placed at their original positions.

        Array of the original length; position i holds values[i - offset]
        when that index exists, NaN otherwise.
        """
        n = self._design.n
        out = np.full(n, np.nan)
        ma = self.values
        start = self.offset
        stop = min(n, start + len(ma))
        if stop > start:
            out[start:stop] = ma[:stop - start]
        return out

    def comparison(self) -> list[ComparisonRow]:
        """
        Original versus moving average, one row per original value.

        Index is 1-based. difference = original - average; percent_change
        = difference / average * 100, None when the average is 0. Rows
        without an aligned average carry None in the last three fields.
        """
        rows = []
        for i, (orig, avg) in enumerate(zip(self.original, self.aligned())):
            if np.isnan(avg):
                rows.append(ComparisonRow(i + 1, float(orig), None, None, None))
                continue
            diff = float(orig - avg)
            pct = diff / avg * 100.0 if avg != 0 else None
            rows.append(ComparisonRow(i + 1, float(orig), float(avg), diff, pct))
        return rows

    def _differences(self) -> NDArray[np.floating[Any]]:
        aligned = self.aligned()
        mask = ~np.isnan(aligned)
        return self.original[mask] - aligned[mask]

    @property
    def mean_difference(self) -> float:
        """Mean of original - average over aligned positions (0 if none)."""
        diffs = self._differences()
        return float(np.mean(diffs)) if diffs.size else 0.0

    @property
    def mean_absolute_error(self) -> float:
        """Mean of |original - average| over aligned positions (0 if none)."""
        diffs = self._differences()
        return float(np.mean(np.abs(diffs))) if diffs.size else 0.0

    def summary(self) -> str:
        """One-line summary: label, value count, mean difference, MAE."""
        from colstats.report.formatting import format_fixed

        parts = [self.label(), f"MA Values: {len(self.values)}"]
        if self._differences().size:
            parts.append(f"Avg Diff: {format_fixed(self.mean_difference)}")
            parts.append(f"MAE: {format_fixed(self.mean_absolute_error)}")
        return " | ".join(parts)

    def __repr__(self) -> str:
        return f"MovingAverageSolution({self.label()}, n={len(self.values)})"
