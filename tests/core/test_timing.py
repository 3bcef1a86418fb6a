"""
Tests for the Timer utility.
"""

import pytest

from colstats.core.compute.timing import Timer, timed


class TestTimer:

    def test_sections_accumulate(self):
        timer = Timer()
        timer.start()
        for _ in range(3):
            with timer.section('tokenize'):
                pass
        timer.stop()
        result = timer.result()
        assert set(result) == {'total_seconds', 'tokenize'}
        assert result['tokenize'] >= 0.0

    def test_stop_before_start_raises(self):
        with pytest.raises(RuntimeError, match="before start"):
            Timer().stop()

    def test_result_before_stop_raises(self):
        timer = Timer()
        timer.start()
        with pytest.raises(RuntimeError, match="before stop"):
            timer.result()

    def test_timed_context(self):
        with timed() as timer:
            pass
        assert timer.result()['total_seconds'] >= 0.0
