"""
Display formatting for statistic values.

Policy for format_value():
    - None, NaN, +/-inf          -> 'N/A'
    - exactly zero               -> '0'
    - |v| >= 1e6 or |v| < 1e-4   -> scientific, up to 4 mantissa decimals ('1.2346E6')
    - otherwise                  -> fixed, thousands separators, up to 6 decimals ('1,234.5')
"""

from __future__ import annotations

import math

from colstats.core.defaults import (
    FIXED_DECIMALS,
    MISSING_DISPLAY,
    SCIENTIFIC_DECIMALS,
    SCIENTIFIC_LOWER,
    SCIENTIFIC_UPPER,
)


def _is_displayable(value) -> bool:
    return value is not None and math.isfinite(value)


def _strip_fraction(text: str) -> str:
    if '.' in text:
        text = text.rstrip('0').rstrip('.')
    return text


def format_fixed(value: float | None) -> str:
    """Fixed notation with thousands separators and up to 6 decimals."""
    if not _is_displayable(value):
        return MISSING_DISPLAY
    return _strip_fraction(f"{value:,.{FIXED_DECIMALS}f}")


def format_scientific(value: float | None) -> str:
    """Scientific notation: mantissa up to 4 decimals, bare exponent ('5E-5')."""
    if not _is_displayable(value):
        return MISSING_DISPLAY
    mantissa, exponent = f"{value:.{SCIENTIFIC_DECIMALS}e}".split('e')
    return f"{_strip_fraction(mantissa)}E{int(exponent)}"


def format_value(value: float | None) -> str:
    """Render one statistic for tables and reports."""
    if not _is_displayable(value):
        return MISSING_DISPLAY
    magnitude = abs(value)
    if magnitude == 0:
        return "0"
    if magnitude >= SCIENTIFIC_UPPER or magnitude < SCIENTIFIC_LOWER:
        return format_scientific(value)
    return format_fixed(value)
