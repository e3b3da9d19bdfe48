"""
Combinatorics — Factorials, Binomials, Permutations, Subsets

Factorial and binomial results are memoized in a MemoCache owned by a
Combinatorics instance. The module-level `factorial` and `binomial` use a
shared default instance; pass your own Combinatorics(cache=...) to isolate
caches.

THREAD SAFETY:
    MemoCache guards its read-check-then-write sequence with a lock, so
    concurrent callers never observe a partially populated entry. Two threads
    may compute the same missing value concurrently; the first result stored
    wins and both callers receive it.
"""

import logging
import math
import threading
from typing import Any, Callable, Hashable, Optional, Sequence, TypeVar, Union

from fermat.core.math.exceptions import InvalidArgument
from fermat.core.math.numerical_safeguards import validate_integer, validate_non_negative_integer

logger = logging.getLogger(__name__)

T = TypeVar("T")


# =============================================================================
# MEMO CACHE
# =============================================================================


class MemoCache:
    """Lock-guarded, append-only memoization map keyed by argument tuples."""

    def __init__(self) -> None:
        self._values: dict[Hashable, Any] = {}
        self._lock = threading.Lock()

    def get_or_compute(self, key: Hashable, compute: Callable[[], T]) -> T:
        """
        Return the cached value for `key`, computing and storing it if missing.

        `compute` runs outside the lock, so it may itself use the cache.
        """
        with self._lock:
            if key in self._values:
                return self._values[key]

        value = compute()

        with self._lock:
            return self._values.setdefault(key, value)

    def clear(self) -> None:
        with self._lock:
            size = len(self._values)
            self._values.clear()
        logger.debug("Cleared memo cache (%d entries)", size)

    def __contains__(self, key: Hashable) -> bool:
        with self._lock:
            return key in self._values

    def __len__(self) -> int:
        with self._lock:
            return len(self._values)


# =============================================================================
# FACTORIAL / BINOMIAL
# =============================================================================


class Combinatorics:
    """Memoized factorial and binomial coefficients."""

    def __init__(self, cache: Optional[MemoCache] = None):
        """
        Args:
            cache: Memo cache to use (default: a new private cache)
        """
        self.cache = cache if cache is not None else MemoCache()

    def factorial(self, x: Any) -> Union[int, float]:
        """
        x! for integer x.

        Returns:
            Exact int for x >= 0, NaN for negative x

        Raises:
            InvalidArgument: If x is not an integer

        Examples:
            >>> Combinatorics().factorial(5)
            120
        """
        n = validate_integer(x, "x")
        if n < 0:
            return math.nan
        return self.cache.get_or_compute(("factorial", n), lambda: math.prod(range(2, n + 1)))

    def binomial(self, n: Any, k: Any) -> int:
        """
        Binomial coefficient n choose k.

        - k == 0 → 1
        - 2k > n → binomial(n, n - k)
        - otherwise the multiplicative formula, exact at every step

        Returns:
            0 if k < 0 or k > n

        Raises:
            InvalidArgument: If n or k is not an integer, or n < 0

        Examples:
            >>> Combinatorics().binomial(5, 2)
            10
        """
        nn = validate_non_negative_integer(n, "n")
        kk = validate_integer(k, "k")
        if kk < 0 or kk > nn:
            return 0
        return self.cache.get_or_compute(("binomial", nn, kk), lambda: self._binomial(nn, kk))

    def _binomial(self, n: int, k: int) -> int:
        if k == 0:
            return 1
        if 2 * k > n:
            return self.binomial(n, n - k)

        coeff = 1
        for i in range(1, k + 1):
            # coeff == C(n - k + i, i) after each step
            coeff = coeff * (n - k + i) // i
        return coeff


_DEFAULT = Combinatorics()


def factorial(x: Any) -> Union[int, float]:
    """x! using the shared default cache. NaN for negative x."""
    return _DEFAULT.factorial(x)


def binomial(n: Any, k: Any) -> int:
    """n choose k using the shared default cache."""
    return _DEFAULT.binomial(n, k)


def default_cache() -> MemoCache:
    """The cache behind the module-level factorial and binomial."""
    return _DEFAULT.cache


# =============================================================================
# PERMUTATIONS / SUBSETS
# =============================================================================


def permutations(seq: Sequence[T]) -> list[list[T]]:
    """
    All orderings of `seq`, generated by Heap's algorithm (recursive swaps).

    The first permutation is the input order. Result has n! entries.

    Examples:
        >>> permutations([1, 2, 3])
        [[1, 2, 3], [2, 1, 3], [3, 1, 2], [1, 3, 2], [2, 3, 1], [3, 2, 1]]
    """
    items = list(seq)
    result: list[list[T]] = []

    def generate(k: int) -> None:
        if k <= 1:
            result.append(items.copy())
            return
        generate(k - 1)
        for i in range(k - 1):
            if k % 2 == 0:
                items[i], items[k - 1] = items[k - 1], items[i]
            else:
                items[0], items[k - 1] = items[k - 1], items[0]
            generate(k - 1)

    generate(len(items))
    return result


def subsets(seq: Sequence[T], length: Optional[int] = None) -> list[list[T]]:
    """
    Power set of `seq`, optionally only the subsets of a given length.

    Built by peeling off the last element: subsets(rest) each appear once
    without it and once with it appended.

    Returns:
        2^n subsets, or C(n, length) subsets when `length` is given

    Examples:
        >>> subsets([1, 2, 3], 2)
        [[2, 3], [1, 3], [1, 2]]
    """
    if length is not None:
        length = validate_non_negative_integer(length, "length")

    def build(items: list[T]) -> list[list[T]]:
        if not items:
            return [[]]
        *rest, last = items
        result: list[list[T]] = []
        for s in build(rest):
            result.append(s)
            result.append(s + [last])
        return result

    results = build(list(seq))
    if length is None:
        return results
    return [s for s in results if len(s) == length]
