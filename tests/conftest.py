"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def sample_lines():
    """Header plus records with a currency column and missing cells."""
    return [
        "item;price;qty",
        "apple;$1,234.50;3",
        "pear;(12.3);n/a",
        "",
        "plum;45%;7",
        "fig;;-",
    ]


@pytest.fixture
def csv_file(tmp_path):
    """Small comma-separated file with a header."""
    path = tmp_path / "sales.csv"
    path.write_text(
        "region,revenue,units\n"
        "north,\"1,200\",10\n"
        "south,950,8\n"
        "east,n/a,12\n"
        "west,1100,\n",
        encoding="utf-8",
    )
    return path
