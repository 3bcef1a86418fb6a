"""
SeriesDesign: the loaded numeric sequence behind every statistic.

Holds an owned copy of the values plus a sorted copy. Every statistic in
the descriptive and smoothing modules is a pure function of this state.
Loading new values means building a new SeriesDesign; nothing is mutated.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import NDArray

from colstats.core.validation import check_array, check_1d


@dataclass(frozen=True)
class SeriesDesign:
    """
    Design for one numeric column.

    Construction:
        SeriesDesign.from_array(values)
        SeriesDesign.from_dataset(dataset, 'price')

    An empty sequence is legal (n = 0); statistics on it return 0.
    """
    _data: NDArray[np.floating[Any]]
    _sorted: NDArray[np.floating[Any]]
    _n: int
    _name: str | None = None

    @classmethod
    def from_array(cls, values, *, name: str | None = None) -> SeriesDesign:
        """
        Build SeriesDesign from array-like data.

        Parameters
        ----------
        values : array-like or None
            1D sequence of numbers. Lists, tuples, numpy arrays and objects
            with a .values attribute (pandas Series) are accepted. None is
            treated as empty.
        name : str, optional
            Column name carried into reports.
        """
        if values is None:
            values = ()
        if hasattr(values, 'values') and not isinstance(values, np.ndarray):
            if name is None and getattr(values, 'name', None) is not None:
                name = str(values.name)
            values = values.values

        data = check_array(values, 'values')
        if data.ndim == 0:
            data = data.reshape(1)
        check_1d(data, 'values')

        return cls._build(data, name=name)

    @classmethod
    def from_dataset(cls, dataset, column: str) -> SeriesDesign:
        """Build from one column of an ingested Dataset (empty if unknown)."""
        return cls._build(dataset.column_values(column), name=column)

    @classmethod
    def _build(cls, data: NDArray, name: str | None = None) -> SeriesDesign:
        data = np.array(data, dtype=np.float64)
        data.setflags(write=False)
        ordered = np.sort(data)
        ordered.setflags(write=False)
        return cls(_data=data, _sorted=ordered, _n=int(data.shape[0]), _name=name)

    @property
    def data(self) -> NDArray[np.floating[Any]]:
        """Values in load order (read-only)."""
        return self._data

    @property
    def sorted_data(self) -> NDArray[np.floating[Any]]:
        """Values sorted ascending (read-only)."""
        return self._sorted

    @property
    def n(self) -> int:
        """Number of values."""
        return self._n

    @property
    def name(self) -> str | None:
        return self._name

    def has_data(self) -> bool:
        return self._n > 0

    def __len__(self) -> int:
        return self._n

    def __repr__(self) -> str:
        label = f"{self._name!r}, " if self._name is not None else ""
        return f"SeriesDesign({label}n={self._n})"
