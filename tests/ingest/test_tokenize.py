"""
Tests for delimiter detection and quote-aware line splitting.
"""

import pytest

from colstats.core.exceptions import ValidationError
from colstats.ingest import detect_delimiter, split_line
from colstats.ingest._delimiter import check_delimiter, count_unquoted


class TestCountUnquoted:

    def test_ignores_quoted(self):
        assert count_unquoted('a,"b,c",d', ',') == 2

    def test_unbalanced_quote_hides_rest(self):
        assert count_unquoted('a,"b,c,d', ',') == 1


class TestDetectDelimiter:

    def test_comma(self):
        assert detect_delimiter("a,b,c") == ","

    def test_semicolon(self):
        assert detect_delimiter("a;b;c") == ";"

    def test_pipe(self):
        assert detect_delimiter("a|b|c") == "|"

    def test_tab(self):
        assert detect_delimiter("a\tb\tc") == "\t"

    def test_tab_wins_tie_with_comma(self):
        assert detect_delimiter("a\tb,c") == "\t"

    def test_semicolon_wins_tie_with_comma(self):
        assert detect_delimiter("a;b,c") == ";"

    def test_semicolon_wins_tie_with_pipe(self):
        assert detect_delimiter("a;b|c") == ";"

    def test_pipe_wins_tie_with_comma(self):
        assert detect_delimiter("a|b,c") == "|"

    def test_quoted_commas_ignored(self):
        # Two quoted commas vs. one unquoted semicolon
        assert detect_delimiter('"x,y,z";b') == ";"

    def test_no_candidates_gives_tab(self):
        assert detect_delimiter("single") == "\t"


class TestSplitLine:

    def test_simple(self):
        assert split_line("a,b,c", ",") == ["a", "b", "c"]

    def test_quoted_delimiter(self):
        assert split_line('"1,200",5', ",") == ["1,200", "5"]

    def test_escaped_quote(self):
        assert split_line('"say ""hi""",x', ",") == ['say "hi"', "x"]

    def test_trailing_empty_field(self):
        assert split_line("a,", ",") == ["a", ""]

    def test_empty_line(self):
        assert split_line("", ",") == [""]

    def test_no_trimming(self):
        assert split_line(" a , b ", ",") == [" a ", " b "]

    def test_other_delimiter_is_text(self):
        assert split_line("a,b;c", ";") == ["a,b", "c"]


class TestCheckDelimiter:

    def test_single_char_ok(self):
        assert check_delimiter("|") == "|"

    @pytest.mark.parametrize("bad", ["", ",,", '"', None])
    def test_rejected(self, bad):
        with pytest.raises(ValidationError):
            check_delimiter(bad)
