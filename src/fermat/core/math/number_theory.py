"""
Number Theory — Primes, Factorization, GCD/LCM

Pure integer algorithms:
- gcd / lcm: Euclid's algorithm, variadic, reduced left to right
- is_prime: small-prime table below 101, trial division up to √n above
- prime_factorization: recursive split at the smallest factor
- list_primes: sieve of Eratosthenes
- prime_factors, goldbach, euler_phi

Integer-only arguments are validated with validate_integer; integral floats
(e.g. 12.0) are accepted, anything else raises InvalidArgument.
"""

import math
from functools import reduce
from typing import Any, Final, Optional

from fermat.core.math.exceptions import InvalidArgument
from fermat.core.math.numerical_safeguards import (
    is_number,
    validate_integer,
    validate_non_negative_integer,
)

# =============================================================================
# CONSTANTS
# =============================================================================

# All primes below SMALL_PRIME_LIMIT
SMALL_PRIMES: Final[frozenset[int]] = frozenset(
    (2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41, 43, 47,
     53, 59, 61, 67, 71, 73, 79, 83, 89, 97)
)
SMALL_PRIME_LIMIT: Final[int] = 101


# =============================================================================
# GCD / LCM
# =============================================================================


def _gcd2(a: int, b: int) -> int:
    a, b = abs(a), abs(b)
    while b:
        a, b = b, a % b
    return a


def _lcm2(a: int, b: int) -> int:
    if a == 0 or b == 0:
        return 0
    return abs(a * b) // _gcd2(a, b)


def gcd(*numbers: Any) -> int:
    """
    Greatest common divisor of one or more integers.

    Raises:
        InvalidArgument: If no numbers are given or any is not an integer

    Examples:
        >>> gcd(12, 18)
        6
        >>> gcd(12, 18, 8)
        2
    """
    if not numbers:
        raise InvalidArgument("gcd requires at least one number")
    values = [validate_integer(n, "gcd argument") for n in numbers]
    return reduce(_gcd2, values[1:], abs(values[0]))


def lcm(*numbers: Any) -> int:
    """
    Lowest common multiple of one or more integers (0 if any is 0).

    Raises:
        InvalidArgument: If no numbers are given or any is not an integer

    Examples:
        >>> lcm(4, 6)
        12
    """
    if not numbers:
        raise InvalidArgument("lcm requires at least one number")
    values = [validate_integer(n, "lcm argument") for n in numbers]
    return reduce(_lcm2, values[1:], abs(values[0]))


# =============================================================================
# PRIMES
# =============================================================================


def is_prime(n: Any) -> bool:
    """
    Primality test.

    Returns:
        False for n <= 1 and for non-integral numbers (e.g. 7.5)

    Raises:
        InvalidArgument: If n is not a finite real number

    Examples:
        >>> is_prime(97)
        True
        >>> is_prime(1)
        False
    """
    if not is_number(n):
        raise InvalidArgument(f"is_prime requires a number, got {type(n).__name__}")
    if not math.isfinite(n):
        raise InvalidArgument(f"is_prime requires a finite number, got {n}")
    if n <= 1 or n != math.floor(n):
        return False

    m = int(n)
    if m < SMALL_PRIME_LIMIT:
        return m in SMALL_PRIMES
    if m % 2 == 0:
        return False

    for i in range(3, math.isqrt(m) + 1, 2):
        if m % i == 0:
            return False
    return True


def prime_factorization(n: Any) -> list[int]:
    """
    Prime factors of n with multiplicity, in ascending order.

    Returns:
        [] for n == 1, [n] for a prime

    Raises:
        InvalidArgument: If n is not an integer >= 1

    Examples:
        >>> prime_factorization(60)
        [2, 2, 3, 5]
    """
    m = validate_integer(n, "n")
    if m < 1:
        raise InvalidArgument(f"n must be >= 1, got {m}")
    return _factorize(m)


def _factorize(n: int) -> list[int]:
    if n == 1:
        return []
    if is_prime(n):
        return [n]

    for f in range(2, math.isqrt(n) + 1):
        if n % f == 0:
            return _factorize(f) + _factorize(n // f)

    # Unreachable: a composite always has a factor <= √n
    return [n]


def prime_factors(n: Any) -> list[int]:
    """Distinct prime factors of n, ascending."""
    return sorted(set(prime_factorization(n)))


def list_primes(n: Any = 100) -> list[int]:
    """
    All primes <= n; [] for n in (0, 1).

    Raises:
        InvalidArgument: If n is not an integer or is negative

    Examples:
        >>> list_primes(20)
        [2, 3, 5, 7, 11, 13, 17, 19]
    """
    limit = validate_non_negative_integer(n, "n")
    if limit < 2:
        return []

    sieve = bytearray([1]) * (limit + 1)
    sieve[0] = sieve[1] = 0
    for i in range(2, math.isqrt(limit) + 1):
        if sieve[i]:
            sieve[i * i :: i] = bytearray(len(range(i * i, limit + 1, i)))
    return [i for i, flag in enumerate(sieve) if flag]


def goldbach(x: Any) -> Optional[tuple[int, int]]:
    """
    Write an even number x >= 4 as the sum of two primes (a <= b).

    Returns:
        (a, b), or None if no decomposition was found

    Raises:
        InvalidArgument: If x is not an even integer >= 4
    """
    m = validate_integer(x, "x")
    if m < 4 or m % 2:
        raise InvalidArgument(f"x must be an even integer >= 4, got {m}")
    if m == 4:
        return (2, 2)

    for a in range(3, m // 2 + 1, 2):
        if is_prime(a) and is_prime(m - a):
            return (a, m - a)
    return None


def euler_phi(x: Any) -> int:
    """
    Euler's totient: count of 1 <= k <= x coprime to x.

    Raises:
        InvalidArgument: If x is not an integer > 0
    """
    m = validate_integer(x, "x")
    if m <= 0:
        raise InvalidArgument(f"x must be greater than zero, got {m}")

    result = m
    for p in prime_factors(m):
        result = result // p * (p - 1)
    return result
