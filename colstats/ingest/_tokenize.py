"""
Quote-aware line splitting.

Each physical line is one record; embedded newlines inside quotes are
not supported. Tokens are returned untrimmed.
"""

from __future__ import annotations

from colstats.core.defaults import QUOTE_CHAR


def split_line(line: str, delimiter: str) -> list[str]:
    """
    Split one line into fields.

    Rules:
        - a delimiter outside quotes ends a field
        - a quote toggles the quoted state and is not kept
        - a doubled quote inside a quoted span is a literal quote
        - the final field ends at end of line (so "a," gives ['a', ''])

    Parameters
    ----------
    line : str
        The line, without its line terminator.
    delimiter : str
        Single-character field separator.

    Returns
    -------
    list of str
        At least one token; an empty line yields [''].
    """
    tokens: list[str] = []
    current: list[str] = []
    in_quotes = False
    i = 0
    n = len(line)

    while i < n:
        c = line[i]
        if c == QUOTE_CHAR:
            if in_quotes and i + 1 < n and line[i + 1] == QUOTE_CHAR:
                current.append(QUOTE_CHAR)
                i += 1
            else:
                in_quotes = not in_quotes
        elif c == delimiter and not in_quotes:
            tokens.append(''.join(current))
            current = []
        else:
            current.append(c)
        i += 1

    tokens.append(''.join(current))
    return tokens
