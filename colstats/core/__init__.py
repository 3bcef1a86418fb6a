"""
Core infrastructure for colstats.

This module provides shared abstractions and utilities used by the
ingestion, descriptive statistics, smoothing and report modules.

Key components:
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    defaults: Parsing policies, default parameters, formatting thresholds
    compute: Timing
"""

from colstats.core.result import Result
from colstats.core.exceptions import (
    ColStatsError,
    ValidationError,
    DimensionError,
    IngestionError,
    IngestionWarning,
)

__all__ = [
    # Result
    "Result",
    # Exceptions
    "ColStatsError",
    "ValidationError",
    "DimensionError",
    "IngestionError",
    "IngestionWarning",
]
