"""
Numeric cell cleaning.

Turns decorated spreadsheet text into a float, or None when the cell
holds no value. None is the "missing" marker; it is never an error.

Accepted decorations:
    $1,234.50   -> 1234.5     (currency symbol, thousands separator)
    45%         -> 45.0       (percent sign is stripped, not scaled)
    (12.3)      -> -12.3      (accounting negative)
    1 234 567   -> 1234567.0  (space as thousands separator)
"""

from __future__ import annotations

import re

from colstats.core.defaults import (
    CURRENCY_SYMBOLS,
    MISSING_TOKENS,
    MISSING_PUNCTUATION,
)

_SYMBOLS = re.compile('[' + re.escape(CURRENCY_SYMBOLS) + ']')

# An ASCII comma or whitespace followed by three ASCII digits. One
# left-to-right pass; the rewritten text is not scanned again.
_THOUSANDS = re.compile(r"[,\s](?=\d{3})", re.ASCII)

# Plain decimal or exponent notation in ASCII digits. Anything else that
# float() would take (nan, inf, digit-group underscores, non-ASCII digits)
# is not a spreadsheet number.
_DECIMAL = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)


def is_missing_token(text: str) -> bool:
    """Whether already-cleaned text denotes "no value"."""
    return (
        not text
        or text.lower() in MISSING_TOKENS
        or text in MISSING_PUNCTUATION
    )


def clean_and_parse(token: str | None) -> float | None:
    """
    Parse a cell into a float.

    Parameters
    ----------
    token : str or None
        Raw cell text.

    Returns
    -------
    float or None
        None for empty cells, the missing-value tokens ('na', 'n/a',
        'null', '-', '.') and anything that is not a plain ASCII decimal
        after cleaning, including nan, inf and non-ASCII digits.
    """
    if token is None:
        return None

    text = token.strip()
    if not text:
        return None

    text = _SYMBOLS.sub('', text)
    text = _THOUSANDS.sub('', text)
    text = text.replace('(', '-').replace(')', '')
    text = text.strip()

    if is_missing_token(text):
        return None

    if not _DECIMAL.fullmatch(text):
        return None
    return float(text)
