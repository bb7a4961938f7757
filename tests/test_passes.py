"""
Tests for the boundary trim pass and its space-insensitive helpers.
"""
from __future__ import annotations

import pytest

from pgn_comments.passes.boundary_trim import (
    BoundaryTrimPass,
    matches_ignoring_spaces,
    strip_spaces,
)


class TestHelpers:
    def test_strip_spaces(self):
        assert strip_spaces("{Foo bar} 1-0") == "{Foobar}1-0"

    def test_strip_spaces_keeps_other_whitespace(self):
        # The PGN parser only drops space characters
        assert strip_spaces("a\tb c") == "a\tbc"

    def test_matches_ignoring_spaces(self):
        assert matches_ignoring_spaces("{Foobar}", "{Foo  bar }")
        assert not matches_ignoring_spaces("{Foobar}", "{Foo bar} e4")


class TestBoundaryTrimPass:
    @pytest.fixture
    def trim(self):
        return BoundaryTrimPass()

    def test_exact_match_returned_verbatim(self, trim):
        guess = "{Foo bar} and {more}"
        assert trim.run("{Foobar}and{more}", guess) == guess

    def test_space_free_line_returned_verbatim(self, trim):
        assert trim.run("abc}", "abc}") == "abc}"

    def test_trailing_notation_trimmed(self, trim):
        assert trim.run("{Foobar}extra", "{Foo bar} extra stuff") == "{Foo bar}"

    def test_trimmed_at_last_delimiter(self, trim):
        guess = "{Uno} 12. e4 {Dos} e5"
        assert trim.run("{Uno}12.e4{Dos}", guess) == "{Uno} 12. e4 {Dos}"

    def test_trimmed_even_when_still_different(self, trim):
        # Returned regardless of the second comparison
        assert trim.run("{Otro}", "21. h3 {Foo bar} Rf4") == "21. h3 {Foo bar}"

    def test_no_delimiter_returned_unchanged(self, trim):
        assert trim.run("abcd", "abc") == "abc"

    def test_delimiter_at_end_unchanged(self, trim):
        assert trim.run("{x}", "{Foo bar}") == "{Foo bar}"

    def test_custom_delimiter(self):
        trim = BoundaryTrimPass(closing_delimiter=")")
        assert trim.run("(Foobar)", "(Foo bar) 1-0") == "(Foo bar)"

    @pytest.mark.parametrize("delimiter", ["", "}}"])
    def test_delimiter_must_be_one_character(self, delimiter):
        with pytest.raises(ValueError):
            BoundaryTrimPass(closing_delimiter=delimiter)
