"""Tests for levenshtein_distance, levenshtein_similarity and the weighted variant."""

from __future__ import annotations

import math

import pytest

from live_search.levenshtein import (
    levenshtein_distance,
    levenshtein_similarity,
    weighted_levenshtein_similarity,
)


class TestLevenshteinDistance:
    @pytest.mark.parametrize(
        ("a", "b", "expected"),
        [
            ("", "", 0),
            ("", "abc", 3),
            ("abc", "", 3),
            ("abc", "abc", 0),
            ("kitten", "sitting", 3),
            ("flaw", "lawn", 2),
            ("hallo", "hell", 2),
            ("naïve", "naive", 1),
        ],
    )
    def test_known_distances(self, a: str, b: str, expected: int) -> None:
        assert levenshtein_distance(a, b) == expected

    def test_returns_int(self) -> None:
        assert type(levenshtein_distance("a", "b")) is int


class TestLevenshteinSimilarity:
    def test_both_empty_is_zero(self) -> None:
        assert levenshtein_similarity("", "") == 0.0

    def test_identical(self) -> None:
        assert levenshtein_similarity("hello", "hello") == 1.0

    def test_one_empty(self) -> None:
        assert levenshtein_similarity("", "abc") == 0.0

    def test_known_value(self) -> None:
        assert levenshtein_similarity("kitten", "sitting") == pytest.approx(4 / 7)

    def test_prefix_of_data(self) -> None:
        assert levenshtein_similarity("he", "hello") == pytest.approx(0.4)


class TestWeightedLevenshteinSimilarity:
    def test_both_empty_is_zero(self) -> None:
        assert weighted_levenshtein_similarity("", "") == 0.0

    def test_identical(self) -> None:
        assert weighted_levenshtein_similarity("hello", "hello") == pytest.approx(1.0)

    def test_hell_vs_hallo(self) -> None:
        expected = (5 - 3 * math.log(2)) / 5
        score = weighted_levenshtein_similarity("hell", "hallo")
        assert score == pytest.approx(expected)

    def test_hallo_prefers_hell(self) -> None:
        hell = weighted_levenshtein_similarity("hell", "hallo")
        assert hell > weighted_levenshtein_similarity("welt", "hallo")
        assert hell > weighted_levenshtein_similarity("world", "hallo")

    def test_contiguous_insertions_beat_scattered_ones(self) -> None:
        """Three letters typed together cost less than three separate typos."""
        contiguous = weighted_levenshtein_similarity("abcdef", "abcxyzdef")
        scattered = weighted_levenshtein_similarity("abcdef", "axbcydezf")
        assert levenshtein_distance("abcdef", "abcxyzdef") == 3
        assert levenshtein_distance("abcdef", "axbcydezf") == 3
        assert contiguous > scattered
