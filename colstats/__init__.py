"""
colstats: column statistics for messy delimited text.

Reads delimited text of mixed textual/numeric content, coerces usable
columns into numeric sequences, and computes descriptive statistics,
order statistics, distribution-shape measures and moving averages.

Submodules:
    ingest: Delimiter detection, quote-aware tokenizing, numeric cleaning
    descriptive: Full statistics snapshot for one column
    smoothing: Simple, four-point, weighted and exponential moving averages
    report: Value formatting and the plain-text analysis report
"""

__version__ = "0.1.0"

from colstats import ingest
from colstats import descriptive
from colstats import smoothing
from colstats import report

__all__ = [
    "__version__",
    "ingest",
    "descriptive",
    "smoothing",
    "report",
]
