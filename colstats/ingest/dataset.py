"""
Dataset: columnar container produced by ingestion.

Two owned collections live side by side:
    - raw records: every non-blank line's tokens, exactly as split
    - columns: per-name lists of the values that parsed as numbers

Columns are sparse relative to records. A cell that does not parse is not
represented by a placeholder, so a column can be shorter than the record
count and its i-th value is not necessarily from the i-th record.

Populated during a single ingestion pass; consumers only read it.
"""

from __future__ import annotations

from typing import Any, Iterable
import numpy as np
from numpy.typing import NDArray


class Dataset:
    """
    Columnar store of parsed numeric values plus raw string records.

    Construction:
        Dataset(source='data.csv'), then add_column / append_value /
        append_record during ingestion, then set_counts once at the end.
    """

    def __init__(self, source: str | None = None):
        self._source = source
        self._column_names: list[str] = []
        self._columns: dict[str, list[float]] = {}
        self._records: list[tuple[str, ...]] = []
        self._total_records = 0
        self._valid_records = 0
        self._skipped_records = 0

    # === Population ===

    def add_column(self, name: str) -> bool:
        """
        Declare a column. Idempotent by name.

        Returns
        -------
        bool
            True if the column was added, False if the name already existed.
        """
        if name in self._columns:
            return False
        self._column_names.append(name)
        self._columns[name] = []
        return True

    def append_value(self, name: str, value: float) -> None:
        """Append a parsed value to a column. Unknown names are ignored."""
        values = self._columns.get(name)
        if values is not None:
            values.append(float(value))

    def append_record(self, tokens: Iterable[str]) -> None:
        """Store one raw record (tuple of untrimmed tokens)."""
        self._records.append(tuple(tokens))

    def set_counts(self, *, total: int, valid: int, skipped: int) -> None:
        """Record the ingestion counters."""
        self._total_records = total
        self._valid_records = valid
        self._skipped_records = skipped

    def reset(self) -> None:
        """Return to the empty state, forgetting the source as well."""
        self._source = None
        self._column_names.clear()
        self._columns.clear()
        self._records.clear()
        self._total_records = 0
        self._valid_records = 0
        self._skipped_records = 0

    # === Read access ===

    @property
    def source(self) -> str | None:
        """Source identifier (file name), or None."""
        return self._source

    @property
    def column_names(self) -> list[str]:
        """Column names in first-seen order (a copy)."""
        return list(self._column_names)

    @property
    def column_count(self) -> int:
        return len(self._column_names)

    def column_values(self, name: str) -> NDArray[np.floating[Any]]:
        """Values of a column as a new float64 array; empty if unknown."""
        return np.array(self._columns.get(name, ()), dtype=np.float64)

    def value_at(self, name: str, index: int) -> float | None:
        """Value at a position within a column, or None if out of range."""
        values = self._columns.get(name)
        if values is None or index < 0 or index >= len(values):
            return None
        return values[index]

    def record_count(self, name: str) -> int:
        """Number of parsed values held by a column (0 if unknown)."""
        values = self._columns.get(name)
        return len(values) if values is not None else 0

    @property
    def raw_records(self) -> tuple[tuple[str, ...], ...]:
        """All raw records, read-only."""
        return tuple(self._records)

    @property
    def total_records(self) -> int:
        """Non-blank data lines seen."""
        return self._total_records

    @property
    def valid_records(self) -> int:
        """Lines that contributed at least one numeric value."""
        return self._valid_records

    @property
    def skipped_records(self) -> int:
        """Lines that contributed no numeric value."""
        return self._skipped_records

    def has_data(self) -> bool:
        """True iff at least one column has been declared."""
        return bool(self._columns) and bool(self._column_names)

    def __contains__(self, name: str) -> bool:
        return name in self._columns

    def __repr__(self) -> str:
        return (
            f"Dataset(source={self._source!r}, columns={len(self._column_names)}, "
            f"records={self._total_records})"
        )
