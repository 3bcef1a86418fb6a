"""
Generic result container for all colstats computations.

The Result class provides a standardized envelope that every module's
output uses: ingestion wraps a Dataset, the statistics engine wraps a
StatisticsParams payload, the smoothing module wraps MovingAverageParams.
Shared tooling (timing, diagnostics, report rendering) can then treat
them uniformly.

Design decisions:
    - Generic over parameter payload P
    - info dict for flexible metadata (delimiter, counters, method)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True)
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope.

    Type Parameters:
        P: The module-specific payload type

    Attributes:
        params: Module-specific payload (Dataset, statistics, MA values)
        info: Structured metadata (method, delimiter, error text)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the code path that produced this result
        warnings: Non-fatal issues encountered during computation

    Examples:
        >>> Result(
        ...     params=dataset,
        ...     info={'delimiter': ',', 'error': None},
        ...     timing={'total_seconds': 0.01, 'delimiter': 0.001, 'records': 0.008},
        ...     backend_name='line_reader'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
