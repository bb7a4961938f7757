"""
Tests for the edit-distance metric and the nearest-line search.
"""
from __future__ import annotations

import pytest

from pgn_comments.errors import NoCandidateLinesError, SpaceRecoveryError
from pgn_comments.matching.levenshtein import levenshtein_distance
from pgn_comments.matching.nearest_line import NearestLineSearch
from pgn_comments.models import LineMatch


# ─────────────────────────────────────────────────────────────────────────────
# levenshtein_distance
# ─────────────────────────────────────────────────────────────────────────────


class TestLevenshteinDistance:
    @pytest.mark.parametrize(
        "a, b, expected",
        [
            ("kitten", "sitting", 3),
            ("flaw", "lawn", 2),
            ("abcd", "abc", 1),
            ("abcd", "ab cd", 1),
            ("abcd", "xyz", 4),
            ("{Foobar}", "{Foo bar}", 1),
            ("peón", "peon", 1),
        ],
    )
    def test_known_distances(self, a, b, expected):
        assert levenshtein_distance(a, b) == expected

    def test_identical_strings(self):
        assert levenshtein_distance("1. e4 e5", "1. e4 e5") == 0

    def test_empty_against_text(self):
        assert levenshtein_distance("", "abc") == 3
        assert levenshtein_distance("abc", "") == 3
        assert levenshtein_distance("", "") == 0

    def test_symmetric(self):
        a = "{Lasblancastienendospiezas}"
        b = "{Las blancas tienen dos piezas} 22. Re7"
        assert levenshtein_distance(a, b) == levenshtein_distance(b, a)

    def test_spaces_count_as_insertions(self):
        line = "{Las blancas tienen dos piezas}"
        assert levenshtein_distance(line.replace(" ", ""), line) == line.count(" ")

    def test_bounded_by_longer_length(self):
        a, b = "Nf3", "O-O-O"
        assert levenshtein_distance(a, b) <= max(len(a), len(b))


# ─────────────────────────────────────────────────────────────────────────────
# NearestLineSearch
# ─────────────────────────────────────────────────────────────────────────────


class TestNearestLineSearch:
    @pytest.fixture
    def search(self):
        return NearestLineSearch()

    def test_returns_line_match(self, search):
        match = search.run("abc", ["xyz", "abc"])
        assert match == LineMatch(index=1, line="abc", distance=0)

    def test_tie_keeps_first_line(self, search):
        # distance("abcd", "abc") == distance("abcd", "ab cd") == 1
        match = search.run("abcd", ["abc", "ab cd", "xyz"])
        assert match.index == 0
        assert match.line == "abc"
        assert match.distance == 1

    def test_tie_order_follows_input(self, search):
        match = search.run("abcd", ["xyz", "ab cd", "abc"])
        assert match.index == 1
        assert match.line == "ab cd"

    def test_spaced_line_preferred_over_unrelated(self, search):
        lines = [
            "1. e4 e5 2. Nf3 Nc6",
            "{Una apertura muy popular}",
            "3. Bb5 a6",
        ]
        match = search.run("{Unaaperturamuypopular}", lines)
        assert match.index == 1
        assert match.distance == 3

    def test_deterministic(self, search):
        lines = ["{a b}", "{ab }", "{ a b}"]
        first = search.run("{ab}", lines)
        assert all(search.run("{ab}", lines) == first for _ in range(5))

    def test_empty_lines_raise(self, search):
        with pytest.raises(NoCandidateLinesError):
            search.run("{abc}", [])

    def test_no_candidates_is_recovery_error(self, search):
        with pytest.raises(SpaceRecoveryError):
            search.run("{abc}", [])

    def test_blank_lines_are_candidates(self, search):
        match = search.run("", ["", "x"])
        assert match.index == 0
        assert match.distance == 0

    def test_to_dict(self):
        match = LineMatch(index=2, line="{a b}", distance=1)
        assert match.to_dict() == {"index": 2, "line": "{a b}", "distance": 1}
