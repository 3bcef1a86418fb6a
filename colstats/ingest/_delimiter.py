"""
Delimiter detection.

The delimiter is chosen once, from the first line of the input, by
counting each candidate outside double-quoted spans. Ties resolve in
DELIMITER_PRIORITY order: tab, semicolon, pipe, comma.
"""

from __future__ import annotations

from colstats.core.defaults import DELIMITER_PRIORITY, QUOTE_CHAR
from colstats.core.exceptions import ValidationError


def count_unquoted(line: str, char: str) -> int:
    """
    Count occurrences of ``char`` outside double-quoted spans.

    Quote state toggles on every quote character; unbalanced quotes are
    allowed and simply leave the rest of the line quoted.
    """
    count = 0
    in_quotes = False
    for c in line:
        if c == QUOTE_CHAR:
            in_quotes = not in_quotes
        elif c == char and not in_quotes:
            count += 1
    return count


def detect_delimiter(line: str) -> str:
    """
    Pick the delimiter for a file from its first line.

    Parameters
    ----------
    line : str
        First physical line of the input.

    Returns
    -------
    str
        One of tab, ';', '|', ','. A candidate wins when its count is
        >= the counts of every candidate after it in priority order, so
        a line with no candidates at all yields tab.
    """
    counts = {d: count_unquoted(line, d) for d in DELIMITER_PRIORITY}
    for i, candidate in enumerate(DELIMITER_PRIORITY):
        rivals = DELIMITER_PRIORITY[i + 1:]
        if all(counts[candidate] >= counts[r] for r in rivals):
            return candidate
    return DELIMITER_PRIORITY[-1]


def check_delimiter(delimiter: str) -> str:
    """Validate an explicit delimiter override."""
    if not isinstance(delimiter, str) or len(delimiter) != 1:
        raise ValidationError(
            f"delimiter: expected a single character, got {delimiter!r}"
        )
    if delimiter == QUOTE_CHAR:
        raise ValidationError("delimiter: the quote character cannot be a delimiter")
    return delimiter
