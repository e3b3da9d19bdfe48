"""
Root Finding — Sign-change bisection

bisect(fn, precision, low, high) finds x with fn(x) ≈ 0:
1. low defaults to 0; an exact zero at low is returned immediately
2. without high, the bracket is found by doubling high from 1 until fn(high)
   changes sign (at most MAX_BRACKET_DOUBLINGS times)
3. the bracket is halved until |fn(low)| <= 10^(-precision)
   (at most MAX_BISECTION_ITERATIONS times)
4. the result is rounded to `precision` decimal digits

Both loops are hard-capped; a missing sign change raises NoRootFound.
"""

import logging
import math
from typing import Callable, Final, Optional

from fermat.core.math.exceptions import InvalidArgument, NoRootFound
from fermat.core.math.numerical_safeguards import round_decimal, validate_non_negative_integer

logger = logging.getLogger(__name__)

# =============================================================================
# LIMITS
# =============================================================================

# Upper bound of the outward search: high reaches 2^63 at most
MAX_BRACKET_DOUBLINGS: Final[int] = 64

MAX_BISECTION_ITERATIONS: Final[int] = 200

DEFAULT_PRECISION: Final[int] = 3


def _evaluate(fn: Callable[[float], float], x: float) -> float:
    value = fn(x)
    if math.isnan(value):
        raise InvalidArgument(f"Function returned NaN at x={x}")
    return value


def _sign(value: float) -> int:
    return (value > 0) - (value < 0)


def bisect(
    fn: Callable[[float], float],
    precision: int = DEFAULT_PRECISION,
    low: Optional[float] = None,
    high: Optional[float] = None,
) -> float:
    """
    Find a root of `fn` by bisection.

    Args:
        fn: Real-valued function of one real variable
        precision: Decimal digits of the result; also sets the stopping
            threshold |fn(x)| <= 10^(-precision) (default: 3)
        low: Lower end of the bracket (default: 0)
        high: Upper end of the bracket (default: searched by doubling)

    Returns:
        Root rounded to `precision` decimal digits

    Raises:
        NoRootFound: If no sign change is found between low and high
        InvalidArgument: If precision is not a non-negative integer or fn
            returns NaN

    Examples:
        >>> bisect(lambda x: x * x - 2, precision=4)
        1.4142
    """
    digits = validate_non_negative_integer(precision, "precision")
    threshold = 10.0**-digits

    lo = 0.0 if low is None else low
    lo_value = _evaluate(fn, lo)
    lo_sign = _sign(lo_value)
    if lo_sign == 0:
        return round_decimal(lo, digits)

    if high is None:
        hi = 0.5
        for _ in range(MAX_BRACKET_DOUBLINGS):
            hi *= 2
            hi_sign = _sign(_evaluate(fn, hi))
            if hi_sign != lo_sign:
                break
        else:
            raise NoRootFound(
                f"No sign change found between {lo} and {hi} "
                f"after {MAX_BRACKET_DOUBLINGS} doublings"
            )
        logger.debug("Bracketed root in [%s, %s]", lo, hi)
    else:
        hi = high
        hi_sign = _sign(_evaluate(fn, hi))
        if hi_sign == lo_sign:
            raise NoRootFound(f"fn({lo}) and fn({hi}) have the same sign")

    if hi_sign == 0:
        return round_decimal(hi, digits)

    iterations = 0
    while abs(lo_value) > threshold and iterations < MAX_BISECTION_ITERATIONS:
        mid = (lo + hi) / 2
        mid_value = _evaluate(fn, mid)
        mid_sign = _sign(mid_value)
        if mid_sign == 0:
            return round_decimal(mid, digits)

        if mid_sign == lo_sign:
            lo, lo_value = mid, mid_value
        else:
            hi = mid
        iterations += 1

    if iterations >= MAX_BISECTION_ITERATIONS:
        logger.warning(
            "Bisection stopped after %d iterations with |fn(x)| = %s",
            iterations,
            abs(lo_value),
        )

    return round_decimal(lo, digits)
