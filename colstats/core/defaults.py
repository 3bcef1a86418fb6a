"""
Tunable constants for colstats.

This module is the SINGLE SOURCE OF TRUTH for parsing policies, default
parameters and formatting thresholds. Import from here, never repeat raw
literals.

Usage:
    from colstats.core.defaults import DEFAULT_EMA_ALPHA, IQR_FENCE

    lower = q1 - IQR_FENCE * iqr
"""

# --- Ingestion ---

# Candidate delimiters, most preferred first (ties resolve to the earlier one)
DELIMITER_PRIORITY = ('\t', ';', '|', ',')

# Quote character for delimiter-protected spans
QUOTE_CHAR = '"'

# Stripped from numeric cells before parsing
CURRENCY_SYMBOLS = '$€£¥%'

# Cells meaning "no value" (compared case-insensitively)
MISSING_TOKENS = frozenset({'na', 'n/a', 'null'})

# Lone punctuation meaning "no value"
MISSING_PUNCTUATION = frozenset({'-', '.'})

# Synthesized column names are COLUMN_PREFIX + 1-based position
COLUMN_PREFIX = 'Column_'

# --- Statistics ---

# Tukey fence multiplier for IQR outliers
IQR_FENCE = 1.5

# |z| above this counts as an outlier in the full analysis
DEFAULT_Z_THRESHOLD = 2.0

# Extra percentiles reported by the full analysis
REPORT_PERCENTILES = (10.0, 90.0)

# Minimum sample sizes below which a statistic is reported as 0
MIN_N_VARIANCE = 2
MIN_N_SKEWNESS = 3
MIN_N_KURTOSIS = 4

# --- Moving averages ---

DEFAULT_EMA_ALPHA = 0.3

FOUR_POINT_WINDOW = 4

# The four-point average aligns one step in, not FOUR_POINT_WINDOW // 2
FOUR_POINT_OFFSET = 1

# --- Formatting ---

# |value| >= SCIENTIFIC_UPPER or < SCIENTIFIC_LOWER renders in scientific notation
SCIENTIFIC_UPPER = 1_000_000
SCIENTIFIC_LOWER = 0.0001

FIXED_DECIMALS = 6
SCIENTIFIC_DECIMALS = 4

MISSING_DISPLAY = 'N/A'

__all__ = [
    'DELIMITER_PRIORITY',
    'QUOTE_CHAR',
    'CURRENCY_SYMBOLS',
    'MISSING_TOKENS',
    'MISSING_PUNCTUATION',
    'COLUMN_PREFIX',
    'IQR_FENCE',
    'DEFAULT_Z_THRESHOLD',
    'REPORT_PERCENTILES',
    'MIN_N_VARIANCE',
    'MIN_N_SKEWNESS',
    'MIN_N_KURTOSIS',
    'DEFAULT_EMA_ALPHA',
    'FOUR_POINT_WINDOW',
    'FOUR_POINT_OFFSET',
    'SCIENTIFIC_UPPER',
    'SCIENTIFIC_LOWER',
    'FIXED_DECIMALS',
    'SCIENTIFIC_DECIMALS',
    'MISSING_DISPLAY',
]
