"""Tests for multiset enumeration."""

import itertools
import math

import pytest

from utils.multisets import count_multisets, iter_multisets


class TestCountMultisets:
    """Tests for the stars-and-bars count."""

    def test_empty_size_has_one_multiset(self):
        assert count_multisets(0, 0) == 1
        assert count_multisets(5, 0) == 1

    def test_empty_set_has_none(self):
        assert count_multisets(0, 3) == 0

    def test_known_counts(self):
        assert count_multisets(4, 2) == 10
        assert count_multisets(3, 11) == math.comb(13, 11)


class TestIterMultisets:
    """Tests for iter_multisets."""

    def test_size_zero_yields_empty(self):
        assert list(iter_multisets([1, 2, 3], 0)) == [()]

    def test_empty_alphabet_yields_nothing(self):
        assert list(iter_multisets([], 2)) == []

    def test_negative_size_raises(self):
        with pytest.raises(ValueError):
            iter_multisets([1, 2], -1)

    @pytest.mark.parametrize("distinct,size", [(1, 4), (3, 2), (4, 3), (5, 5)])
    def test_count_matches_stars_and_bars(self, distinct, size):
        results = list(iter_multisets(list(range(distinct)), size))
        assert len(results) == count_multisets(distinct, size)

    def test_every_multiset_has_requested_size(self):
        assert all(len(m) == 4 for m in iter_multisets([80, 81, 82], 4))

    def test_no_duplicates_for_distinct_alphabet(self):
        results = [tuple(sorted(m)) for m in iter_multisets([80, 81, 82, 83], 3)]
        assert len(results) == len(set(results))

    def test_matches_itertools(self):
        alphabet = [80, 81, 82, 83]
        expected = {tuple(sorted(c)) for c in itertools.combinations_with_replacement(alphabet, 3)}
        actual = {tuple(sorted(m)) for m in iter_multisets(alphabet, 3)}
        assert actual == expected

    def test_repeated_values_are_treated_positionally(self):
        """Duplicates in the alphabet produce equal multisets more than once."""
        results = list(iter_multisets([84, 84], 1))
        assert results == [(84,), (84,)]

    def test_restartable(self):
        assert list(iter_multisets([1, 2, 3], 3)) == list(iter_multisets([1, 2, 3], 3))

    def test_lazy(self):
        """Pulling one multiset doesn't require enumerating the rest."""
        generator = iter_multisets(list(range(40)), 11)
        first = next(generator)
        assert len(first) == 11


class TestMaxCounts:
    """Tests for stock-capped enumeration."""

    def test_caps_copies_per_value(self):
        results = list(iter_multisets([84, 85], 3, max_counts={84: 1, 85: 3}))
        assert sorted(results) == [(84, 85, 85), (85, 85, 85)]

    def test_values_missing_from_caps_are_unused(self):
        results = list(iter_multisets([84, 85], 2, max_counts={85: 2}))
        assert results == [(85, 85)]

    def test_not_enough_stock_yields_nothing(self):
        assert list(iter_multisets([84, 85], 4, max_counts={84: 1, 85: 1})) == []

    def test_generous_caps_match_uncapped(self):
        alphabet = [80, 81, 82]
        capped = list(iter_multisets(alphabet, 3, max_counts={80: 9, 81: 9, 82: 9}))
        assert capped == list(iter_multisets(alphabet, 3))
