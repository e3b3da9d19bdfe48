"""
Tests for Combinatorics

Checks:
1. factorial (exact, recurrence, NaN for negatives)
2. binomial (symmetry, Pascal's rule, out-of-range k)
3. MemoCache behaviour and thread safety
4. permutations (Heap's algorithm order, n! distinct results)
5. subsets (2^n results, length filter)
"""

import logging
import math
import threading
from itertools import combinations

import pytest

from fermat.core.math.combinatorics import (
    Combinatorics,
    MemoCache,
    binomial,
    default_cache,
    factorial,
    permutations,
    subsets,
)
from fermat.core.math.exceptions import InvalidArgument


@pytest.fixture
def combinatorics():
    """Instance with a private cache"""
    return Combinatorics(cache=MemoCache())


# =============================================================================
# FACTORIAL
# =============================================================================


class TestFactorial:
    """Tests for factorial"""

    def test_small_values(self):
        assert factorial(0) == 1
        assert factorial(1) == 1
        assert factorial(5) == 120
        assert factorial(10) == 3628800

    def test_exact_for_large_values(self):
        assert factorial(30) == math.factorial(30)
        assert isinstance(factorial(30), int)

    def test_recurrence(self):
        """n! == n · (n-1)!"""
        for n in range(1, 50):
            assert factorial(n) == n * factorial(n - 1)

    def test_negative_is_nan(self):
        assert math.isnan(factorial(-1))
        assert math.isnan(factorial(-10))

    def test_integral_float(self):
        assert factorial(5.0) == 120

    def test_non_integer(self):
        with pytest.raises(InvalidArgument):
            factorial(2.5)
        with pytest.raises(InvalidArgument):
            factorial("5")


# =============================================================================
# BINOMIAL
# =============================================================================


class TestBinomial:
    """Tests for binomial"""

    def test_values(self):
        assert binomial(5, 2) == 10
        assert binomial(10, 0) == 1
        assert binomial(10, 10) == 1
        assert binomial(52, 5) == 2598960

    def test_exact_for_large_values(self):
        assert binomial(100, 50) == math.comb(100, 50)

    def test_symmetry(self):
        for n in range(25):
            for k in range(n + 1):
                assert binomial(n, k) == binomial(n, n - k)

    def test_pascal_rule(self):
        for n in range(1, 25):
            for k in range(1, n):
                assert binomial(n, k) == binomial(n - 1, k - 1) + binomial(n - 1, k)

    def test_k_out_of_range(self):
        assert binomial(5, 6) == 0
        assert binomial(5, -1) == 0

    def test_invalid(self):
        with pytest.raises(InvalidArgument):
            binomial(-1, 0)
        with pytest.raises(InvalidArgument):
            binomial(5, 1.5)


# =============================================================================
# MEMO CACHE
# =============================================================================


class TestMemoCache:
    """Tests for MemoCache and cache use by Combinatorics"""

    def test_get_or_compute_computes_once(self):
        cache = MemoCache()
        calls = []

        def compute():
            calls.append(1)
            return 42

        assert cache.get_or_compute("k", compute) == 42
        assert cache.get_or_compute("k", compute) == 42
        assert len(calls) == 1
        assert "k" in cache
        assert len(cache) == 1

    def test_clear(self, caplog):
        cache = MemoCache()
        cache.get_or_compute("a", lambda: 1)
        with caplog.at_level(logging.DEBUG, logger="fermat.core.math.combinatorics"):
            cache.clear()
        assert len(cache) == 0
        assert "Cleared memo cache (1 entries)" in caplog.text

    def test_results_are_cached(self, combinatorics):
        combinatorics.factorial(6)
        combinatorics.binomial(10, 7)
        assert ("factorial", 6) in combinatorics.cache
        # Symmetry reduction caches both halves
        assert ("binomial", 10, 7) in combinatorics.cache
        assert ("binomial", 10, 3) in combinatorics.cache

    def test_injected_cache_is_used(self):
        """An empty cache passed in is kept, not replaced"""
        shared = MemoCache()
        first = Combinatorics(cache=shared)
        second = Combinatorics(cache=shared)
        assert first.cache is shared

        first.factorial(5)
        assert len(shared) == 1
        assert ("factorial", 5) in second.cache

    def test_instances_are_isolated(self, combinatorics):
        other = Combinatorics()
        combinatorics.factorial(7)
        assert ("factorial", 7) not in other.cache

    def test_default_cache(self):
        factorial(12)
        assert ("factorial", 12) in default_cache()

    def test_concurrent_access(self, combinatorics):
        """Threads sharing one cache all see the same, correct values"""
        errors = []

        def worker(offset):
            try:
                for n in range(offset, offset + 40):
                    for k in range(0, n + 1, 3):
                        assert combinatorics.binomial(n, k) == math.comb(n, k)
                    assert combinatorics.factorial(n) == math.factorial(n)
            except AssertionError as e:
                errors.append(e)

        threads = [threading.Thread(target=worker, args=(i % 4,)) for i in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert errors == []


# =============================================================================
# PERMUTATIONS / SUBSETS
# =============================================================================


class TestPermutations:
    """Tests for permutations"""

    def test_order(self):
        assert permutations([1, 2, 3]) == [
            [1, 2, 3],
            [2, 1, 3],
            [3, 1, 2],
            [1, 3, 2],
            [2, 3, 1],
            [3, 2, 1],
        ]

    @pytest.mark.parametrize("n", [0, 1, 2, 3, 4, 5, 6])
    def test_count_and_distinct(self, n):
        items = list(range(n))
        result = permutations(items)
        assert len(result) == math.factorial(n)
        assert len({tuple(p) for p in result}) == len(result)
        assert result[0] == items

    def test_input_unchanged(self):
        items = ["a", "b", "c"]
        permutations(items)
        assert items == ["a", "b", "c"]

    def test_each_is_rearrangement(self):
        for p in permutations("abcd"):
            assert sorted(p) == ["a", "b", "c", "d"]


class TestSubsets:
    """Tests for subsets"""

    def test_all_subsets_order(self):
        assert subsets([1, 2, 3]) == [
            [],
            [3],
            [2],
            [2, 3],
            [1],
            [1, 3],
            [1, 2],
            [1, 2, 3],
        ]

    def test_by_length(self):
        assert subsets([1, 2, 3], 2) == [[2, 3], [1, 3], [1, 2]]
        assert subsets([1, 2, 3], 0) == [[]]
        assert subsets([1, 2, 3], 4) == []

    @pytest.mark.parametrize("n", [0, 1, 2, 5, 8])
    def test_count(self, n):
        items = list(range(n))
        assert len(subsets(items)) == 2**n
        for k in range(n + 1):
            assert len(subsets(items, k)) == math.comb(n, k)

    def test_same_sets_as_itertools(self):
        items = [1, 2, 3, 4]
        for k in range(5):
            got = {tuple(s) for s in subsets(items, k)}
            assert got == set(combinations(items, k))

    def test_invalid_length(self):
        with pytest.raises(InvalidArgument):
            subsets([1, 2], -1)
