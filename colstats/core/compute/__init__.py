"""
Shared compute infrastructure for colstats.

Submodules:
    timing: Execution timing utilities
"""

from colstats.core.compute.timing import Timer, timed

__all__ = [
    "Timer",
    "timed",
]
