"""
Ingestion module.

Turns delimited text with mixed textual/numeric content into a columnar
Dataset of parsed numeric values plus the raw string records.

Public API:
    read_file(path)      - Load a delimited text file
    read_lines(lines)    - Load lines already in memory
    clean_and_parse(s)   - Numeric cell cleaning (None = missing)
    detect_delimiter(s)  - Delimiter choice for a first line
    split_line(s, d)     - Quote-aware field splitting
"""

from colstats.ingest.dataset import Dataset
from colstats.ingest.solution import IngestSolution
from colstats.ingest.solvers import read_file, read_lines, EMPTY_INPUT_MESSAGE
from colstats.ingest._numeric import clean_and_parse
from colstats.ingest._delimiter import detect_delimiter
from colstats.ingest._tokenize import split_line

__all__ = [
    "read_file",
    "read_lines",
    "clean_and_parse",
    "detect_delimiter",
    "split_line",
    "Dataset",
    "IngestSolution",
    "EMPTY_INPUT_MESSAGE",
]
