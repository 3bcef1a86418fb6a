"""
Ingestion entry points.

Provides read_file() for paths and read_lines() for text that is already
in memory. Both return an IngestSolution and never raise for unreadable,
empty or malformed input: the failure is reported through the solution's
error string instead.
"""

from __future__ import annotations

import re
import warnings
from pathlib import Path
from typing import Iterable

from colstats.core.compute.timing import Timer
from colstats.core.defaults import COLUMN_PREFIX
from colstats.core.exceptions import IngestionError, IngestionWarning
from colstats.core.result import Result
from colstats.ingest._delimiter import detect_delimiter, check_delimiter
from colstats.ingest._numeric import clean_and_parse
from colstats.ingest._tokenize import split_line
from colstats.ingest.dataset import Dataset
from colstats.ingest.solution import IngestSolution


EMPTY_INPUT_MESSAGE = "File is empty"

_LINE_BREAK = re.compile(r'\r\n|\r|\n')
_BOM = '\ufeff'


def split_physical_lines(text: str) -> list[str]:
    """
    Split text on \\n, \\r\\n or \\r.

    A trailing line break does not produce a final empty line, so ''
    gives [] and 'a\\n' gives ['a'].
    """
    lines = _LINE_BREAK.split(text)
    if lines and lines[-1] == '':
        lines.pop()
    return lines


def _read_text_lines(path: Path, encoding: str) -> list[str]:
    try:
        text = path.read_text(encoding=encoding)
    except (OSError, UnicodeDecodeError) as e:
        raise IngestionError(
            f"Error reading file: {e}", path=str(path), reason=str(e)
        ) from e
    return split_physical_lines(text)


def _header_names(tokens: list[str], has_header: bool) -> list[str]:
    if not has_header:
        return [f"{COLUMN_PREFIX}{i + 1}" for i in range(len(tokens))]

    names = []
    for i, token in enumerate(tokens):
        name = token.strip()
        names.append(name if name else f"{COLUMN_PREFIX}{i + 1}")
    return names


def _empty_solution(
    source: str | None,
    error: str,
    timer: Timer,
    backend_name: str,
) -> IngestSolution:
    timer.stop()
    result = Result(
        params=Dataset(source=source),
        info={'error': error, 'delimiter': None, 'delimiter_detected': False},
        timing=timer.result(),
        backend_name=backend_name,
    )
    return IngestSolution(_result=result)


def _ingest(
    lines: list[str],
    *,
    has_header: bool,
    delimiter: str | None,
    source: str | None,
    timer: Timer,
    backend_name: str,
) -> IngestSolution:
    """Single pass over the lines; lines must already be materialized."""
    if not lines:
        return _empty_solution(source, EMPTY_INPUT_MESSAGE, timer, backend_name)

    warnings_list: list[str] = []
    dataset = Dataset(source=source)

    if lines[0].startswith(_BOM):
        lines[0] = lines[0][len(_BOM):]
    first = lines[0]

    with timer.section('delimiter'):
        if delimiter is None:
            delim = detect_delimiter(first)
            detected = True
        else:
            delim = check_delimiter(delimiter)
            detected = False

    # positions[i] is the column fed by field i; None for a duplicate name
    positions: list[str | None] = []
    with timer.section('header'):
        for name in _header_names(split_line(first, delim), has_header):
            if dataset.add_column(name):
                positions.append(name)
            else:
                positions.append(None)
                warnings_list.append(f"Duplicate column name {name!r} ignored")

    total = valid = skipped = 0
    overlong = 0
    start = 1 if has_header else 0

    with timer.section('records'):
        for raw_line in lines[start:]:
            line = raw_line.strip()
            if not line:
                continue

            total += 1
            tokens = split_line(line, delim)
            if len(tokens) > len(positions):
                overlong += 1

            has_value = False
            for name, token in zip(positions, tokens):
                if name is None:
                    continue
                value = clean_and_parse(token)
                if value is not None:
                    dataset.append_value(name, value)
                    has_value = True

            dataset.append_record(tokens)

            if has_value:
                valid += 1
            else:
                skipped += 1

    dataset.set_counts(total=total, valid=valid, skipped=skipped)

    if overlong:
        warnings_list.append(
            f"{overlong} record(s) had more fields than the {len(positions)} "
            f"header field(s); extra fields kept only in raw records"
        )
    if skipped:
        warnings_list.append(
            f"{skipped} record(s) contained no numeric values"
        )

    timer.stop()
    result = Result(
        params=dataset,
        info={
            'error': None,
            'delimiter': delim,
            'delimiter_detected': detected,
            'has_header': has_header,
            'n_lines': len(lines),
        },
        timing=timer.result(),
        backend_name=backend_name,
        warnings=tuple(warnings_list),
    )
    return IngestSolution(_result=result)


def read_lines(
    lines: Iterable[str],
    *,
    has_header: bool = True,
    delimiter: str | None = None,
    source: str | None = None,
) -> IngestSolution:
    """
    Build a Dataset from lines of delimited text.

    Parameters
    ----------
    lines : iterable of str
        One record per element. Trailing line terminators are removed.
    has_header : bool
        Whether the first line holds column names. Otherwise columns are
        named Column_1 .. Column_k after the first line's field count.
    delimiter : str, optional
        Single-character delimiter. If None (default) it is detected from
        the first line.
    source : str, optional
        Identifier recorded as the dataset's source.

    Returns
    -------
    IngestSolution
        With error 'File is empty' when there are no lines.

    Raises
    ------
    ValidationError
        Only for an invalid explicit delimiter.
    """
    timer = Timer()
    timer.start()
    materialized = [line.rstrip('\r\n') for line in lines]
    return _ingest(
        materialized,
        has_header=has_header,
        delimiter=delimiter,
        source=source,
        timer=timer,
        backend_name='line_reader',
    )


def read_file(
    path: str | Path,
    *,
    has_header: bool = True,
    delimiter: str | None = None,
    encoding: str = 'utf-8',
) -> IngestSolution:
    """
    Build a Dataset from a delimited text file.

    The file's name (not its full path) becomes the dataset source. A file
    that cannot be read, cannot be decoded, or holds no lines produces an
    empty dataset with the reason in ``error`` and an IngestionWarning.

    Parameters
    ----------
    path : str or Path
        File to read.
    has_header : bool
        Whether the first line holds column names.
    delimiter : str, optional
        Explicit delimiter; detected when None.
    encoding : str
        Text encoding. A leading byte-order mark is always dropped.

    Returns
    -------
    IngestSolution
    """
    path = Path(path)
    timer = Timer()
    timer.start()

    try:
        with timer.section('read'):
            lines = _read_text_lines(path, encoding)
    except IngestionError as e:
        warnings.warn(str(e), IngestionWarning, stacklevel=2)
        return _empty_solution(path.name, str(e), timer, 'file_reader')

    solution = _ingest(
        lines,
        has_header=has_header,
        delimiter=delimiter,
        source=path.name,
        timer=timer,
        backend_name='file_reader',
    )
    if solution.error == EMPTY_INPUT_MESSAGE:
        warnings.warn(
            f"{path.name}: {EMPTY_INPUT_MESSAGE}", IngestionWarning, stacklevel=2
        )
    return solution
