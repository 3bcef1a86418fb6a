"""
Ingestion solution type.

Wraps Result[Dataset] with the last-error channel callers check before
using the data.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from colstats.core.result import Result
from colstats.ingest.dataset import Dataset


@dataclass
class IngestSolution:
    """
    User-facing ingestion result.

    Ingestion never raises for bad input. Callers check has_error and
    has_data, then read the dataset.
    """
    _result: Result[Dataset]

    @property
    def dataset(self) -> Dataset:
        return self._result.params

    @property
    def error(self) -> str | None:
        """Human-readable reason the last read failed, or None."""
        return self._result.info.get('error')

    @property
    def has_error(self) -> bool:
        return self.error is not None

    @property
    def has_data(self) -> bool:
        return self.dataset.has_data()

    @property
    def delimiter(self) -> str | None:
        """Delimiter used for splitting (None if nothing was read)."""
        return self._result.info.get('delimiter')

    @property
    def delimiter_detected(self) -> bool:
        """False when the delimiter came from an explicit override."""
        return bool(self._result.info.get('delimiter_detected', False))

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

    def summary(self) -> str:
        """One-paragraph account of the ingestion pass."""
        ds = self.dataset
        lines = [f"Source: {ds.source or '<lines>'}"]
        if self.has_error:
            lines.append(f"Error: {self.error}")
            return "\n".join(lines)

        delim = {'\t': 'tab', ' ': 'space'}.get(self.delimiter, self.delimiter)
        how = "detected" if self.delimiter_detected else "given"
        lines.append(f"Delimiter: {delim!r} ({how})")
        lines.append(f"Columns: {ds.column_count}")
        lines.append(
            f"Records: {ds.total_records} total, {ds.valid_records} valid, "
            f"{ds.skipped_records} skipped"
        )
        for name in ds.column_names:
            lines.append(f"  {name}: {ds.record_count(name)} values")
        return "\n".join(lines)

    def __repr__(self) -> str:
        ds = self.dataset
        status = f"error={self.error!r}" if self.has_error else (
            f"columns={ds.column_count}, records={ds.total_records}"
        )
        return f"IngestSolution({status})"
