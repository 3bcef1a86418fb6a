"""Compute backends for descriptive statistics."""

from colstats.descriptive.backends.cpu import CPUStatisticsBackend, COMPUTE_GROUPS

__all__ = [
    "CPUStatisticsBackend",
    "COMPUTE_GROUPS",
]
