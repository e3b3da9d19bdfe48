"""
Probability — Discrete and continuous distribution helpers

Discrete probabilities (binomial, geometric, Poisson) are built on the
memoized `binomial` and `factorial` from combinatorics. Their count argument
must be a non-negative integer; anything else raises InvalidArgument.

Continuous helpers (normal, exponential, uniform) return density values.
Probability arguments must lie in [0, 1].
"""

import math
import sys
from typing import Any, Final

from fermat.core.math.combinatorics import binomial, factorial
from fermat.core.math.exceptions import InvalidArgument
from fermat.core.math.numerical_safeguards import is_number, validate_non_negative_integer

# Largest n with n! representable as a float
MAX_FLOAT_FACTORIAL: Final[int] = 170

# Largest exponent whose exp() is a finite float
MAX_LOG_FLOAT: Final[float] = math.log(sys.float_info.max)


def _validate_probability(p: Any, name: str = "p") -> float:
    if not is_number(p) or not 0 <= p <= 1:
        raise InvalidArgument(f"{name} must be a probability in [0, 1], got {p!r}")
    return float(p)


def _validate_positive(value: Any, name: str) -> float:
    if not is_number(value) or not math.isfinite(value) or value <= 0:
        raise InvalidArgument(f"{name} must be a positive number, got {value!r}")
    return float(value)


# =============================================================================
# DISCRETE DISTRIBUTIONS
# =============================================================================


def binomial_probability(x: Any, n: Any, p: float) -> float:
    """
    P(X = x) for X ~ Binomial(n, p).

    Returns:
        0.0 if x > n

    Raises:
        InvalidArgument: If x or n is not a non-negative integer, or p is
            not in [0, 1]

    Examples:
        >>> binomial_probability(2, 4, 0.5)
        0.375
    """
    k = validate_non_negative_integer(x, "x")
    trials = validate_non_negative_integer(n, "n")
    q = _validate_probability(p)
    if k > trials:
        return 0.0
    return binomial(trials, k) * q**k * (1 - q) ** (trials - k)


def geometric_probability(x: Any, p: float) -> float:
    """
    P(X = x) for the number of trials X up to and including the first success.

    Raises:
        InvalidArgument: If x is not an integer >= 1, or p is not in [0, 1]
    """
    k = validate_non_negative_integer(x, "x")
    if k < 1:
        raise InvalidArgument(f"x must be >= 1, got {k}")
    q = _validate_probability(p)
    return (1 - q) ** (k - 1) * q


def geometric_cdf(x: Any, p: float) -> float:
    """P(X <= x) for the geometric distribution: 1 - (1 - p)^x."""
    k = validate_non_negative_integer(x, "x")
    q = _validate_probability(p)
    return 1 - (1 - q) ** k


def poisson_probability(x: Any, lam: float) -> float:
    """
    P(X = x) for X ~ Poisson(lam).

    Once k! or lam**k would overflow a float the computation moves to log
    space.

    Raises:
        InvalidArgument: If x is not a non-negative integer or lam < 0
    """
    k = validate_non_negative_integer(x, "x")
    if not is_number(lam) or not math.isfinite(lam) or lam < 0:
        raise InvalidArgument(f"lam must be a non-negative number, got {lam!r}")
    if lam == 0:
        return 1.0 if k == 0 else 0.0
    if k <= MAX_FLOAT_FACTORIAL and k * math.log(lam) < MAX_LOG_FLOAT:
        return math.exp(-lam) * lam**k / factorial(k)
    return math.exp(k * math.log(lam) - lam - math.lgamma(k + 1))


# =============================================================================
# CONTINUOUS DENSITIES
# =============================================================================


def normal_probability(x: float, mean: float = 0.0, std_dev: float = 1.0) -> float:
    """Normal density at x."""
    sigma = _validate_positive(std_dev, "std_dev")
    z = (x - mean) / sigma
    return math.exp(-0.5 * z * z) / (sigma * math.sqrt(2 * math.pi))


def exponential_probability(x: float, lam: float = 1.0) -> float:
    """Exponential density at x (0 for x < 0)."""
    rate = _validate_positive(lam, "lam")
    if x < 0:
        return 0.0
    return rate * math.exp(-rate * x)


def uniform_probability(x: float, a: float, b: float) -> float:
    """
    Uniform density on [a, b] at x.

    Raises:
        InvalidArgument: If a >= b
    """
    if a >= b:
        raise InvalidArgument(f"Uniform distribution needs a < b, got [{a}, {b}]")
    return 1 / (b - a) if a <= x <= b else 0.0


# =============================================================================
# EVENTS
# =============================================================================


def joint_probability(p_a: float, p_b: float) -> float:
    """P(A and B) for independent events."""
    return _validate_probability(p_a, "p_a") * _validate_probability(p_b, "p_b")


def conditional_probability(p_a_and_b: float, p_b: float) -> float:
    """
    P(A | B) = P(A and B) / P(B).

    Raises:
        InvalidArgument: If P(B) is zero
    """
    joint = _validate_probability(p_a_and_b, "p_a_and_b")
    given = _validate_probability(p_b, "p_b")
    if given == 0:
        raise InvalidArgument("Conditional probability is undefined when P(B) = 0")
    return joint / given
