"""
Numerical Safeguards — Scalar Math Primitives

Pure scalar helpers used by every other module:
- Epsilon-tolerant comparisons (nearly_equals, is_integer, is_between, sign)
- Rounding (round_decimal, round_to)
- Modulo and bounding (mod, clamp)
- Small polynomial helpers (lerp, square, cube, log, quadratic, polynomial)
- Argument validation for integer-only operations

INVARIANTS:
1. NaN is never "nearly equal" to anything (including NaN)
2. Tolerant functions take an optional `tol`; None means the active MathConfig
3. Degenerate arithmetic returns inf/NaN sentinels, validation raises InvalidArgument
"""

import math
import numbers
from typing import Any, Final, Optional, Sequence

from fermat.core.math.config import resolve_tolerance
from fermat.core.math.exceptions import InvalidArgument

# =============================================================================
# CONSTANTS
# =============================================================================

PHI: Final[float] = 1.618033988749895
SQRT2: Final[float] = 1.4142135623730951
TWO_PI: Final[float] = 2 * math.pi


# =============================================================================
# TYPE CHECKS
# =============================================================================


def is_number(value: Any) -> bool:
    """True for real numbers (int, float, ...) excluding bool."""
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def is_valid_float(value: float) -> bool:
    """
    Check that a float is finite (not NaN, not Inf).

    Args:
        value: Value to check

    Returns:
        True if the value is finite
    """
    return math.isfinite(value)


# =============================================================================
# EPSILON COMPARISONS
# =============================================================================


def nearly_equals(a: float, b: float, tol: Optional[float] = None) -> bool:
    """
    Check whether two numbers are equal up to a tolerance.

    Algorithm:
        abs(a - b) < tol

    Args:
        a: First value
        b: Second value
        tol: Absolute tolerance (default: active MathConfig tolerance)

    Returns:
        True if the values are closer than `tol`; always False for NaN

    Examples:
        >>> nearly_equals(1.0, 1.0 + 1e-9)
        True
        >>> nearly_equals(1.0, 1.1)
        False
        >>> nearly_equals(float('nan'), float('nan'))
        False
    """
    if math.isnan(a) or math.isnan(b):
        return False
    return abs(a - b) < resolve_tolerance(tol)


def is_integer(x: float, tol: Optional[float] = None) -> bool:
    """
    Check whether a number is integral up to a tolerance.

    Examples:
        >>> is_integer(3.0000000001)
        True
        >>> is_integer(2.5)
        False
    """
    if not is_valid_float(x):
        return False
    fractional = x - math.floor(x)
    return nearly_equals(fractional, 0.0, tol) or nearly_equals(fractional, 1.0, tol)


def is_between(value: float, a: float, b: float, tol: Optional[float] = None) -> bool:
    """
    Check whether `value` lies strictly inside (a, b), by more than `tol`.

    The bounds may be given in either order.
    """
    t = resolve_tolerance(tol)
    if a > b:
        a, b = b, a
    return a + t < value < b - t


def sign(value: float, tol: Optional[float] = None) -> int:
    """
    Sign of a number as +1, 0 or -1, with values within `tol` of 0 mapped to 0.

    Examples:
        >>> sign(-3.2)
        -1
        >>> sign(1e-9)
        0
    """
    if nearly_equals(value, 0.0, tol):
        return 0
    return 1 if value > 0 else -1


# =============================================================================
# ROUNDING
# =============================================================================


def _round_half_away(ratio: float) -> int:
    # Round half away from zero, unlike Python's round-half-even
    if ratio >= 0:
        return math.floor(ratio + 0.5)
    return math.ceil(ratio - 0.5)


def round_decimal(n: float, precision: int = 0) -> float:
    """
    Round `n` to `precision` decimal places (half away from zero).

    NaN/Inf are returned unchanged.

    Examples:
        >>> round_decimal(1.41421356, 4)
        1.4142
        >>> round_decimal(2.5)
        3.0
    """
    if not is_valid_float(n):
        return n
    factor = 10.0**precision
    return _round_half_away(n * factor) / factor


def round_to(n: float, increment: float = 1.0) -> float:
    """
    Round `n` to the nearest multiple of `increment`.

    Raises:
        InvalidArgument: If increment is not positive

    Examples:
        >>> round_to(125.0, 10.0)
        130.0
    """
    if increment <= 0:
        raise InvalidArgument(f"increment must be positive, got {increment}")
    if not is_valid_float(n):
        return n
    return _round_half_away(n / increment) * increment


# =============================================================================
# MODULO AND BOUNDING
# =============================================================================


def mod(a: float, m: float) -> float:
    """
    Mathematical modulo: the result has the sign of `m`.

    `mod(a, 0)` returns NaN instead of raising ZeroDivisionError.

    Examples:
        >>> mod(-1, 5)
        4
    """
    if m == 0:
        return math.nan
    return a % m


def clamp(
    value: float,
    min_value: float = -math.inf,
    max_value: float = math.inf,
) -> float:
    """
    Bound a value between a lower and an upper limit.

    Examples:
        >>> clamp(5.0, 0.0, 10.0)
        5.0
        >>> clamp(-1.0, 0.0, 10.0)
        0.0
        >>> clamp(15.0, 0.0, 10.0)
        10.0
    """
    return min(max_value, max(min_value, value))


# =============================================================================
# SMALL POLYNOMIALS
# =============================================================================


def lerp(a: float, b: float, t: float = 0.5) -> float:
    """Linear interpolation between a (t=0) and b (t=1)."""
    return a + (b - a) * t


def square(x: float) -> float:
    return x * x


def cube(x: float) -> float:
    return x * x * x


def log(x: float, base: Optional[float] = None) -> float:
    """
    Logarithm of x, natural unless `base` is given.

    Returns:
        -inf for x == 0 and NaN for x < 0 (or an invalid base),
        instead of raising

    Examples:
        >>> log(1)
        0.0
        >>> log(-1)
        nan
    """
    if math.isnan(x) or x < 0:
        return math.nan
    if x == 0:
        return -math.inf
    if base is None:
        return math.log(x)
    if base <= 0 or base == 1:
        return math.nan
    return math.log(x) / math.log(base)


def quadratic(a: float, b: float, c: float, tol: Optional[float] = None) -> list[float]:
    """
    Real solutions of a*x^2 + b*x + c = 0.

    Returns:
        [] if there is no real solution (or a ≈ b ≈ 0),
        [x] for a linear equation (a ≈ 0),
        [x1, x2] otherwise (a double root is listed twice)
    """
    if nearly_equals(a, 0.0, tol) and nearly_equals(b, 0.0, tol):
        return []
    if nearly_equals(a, 0.0, tol):
        return [-c / b]

    discriminant = b * b - 4 * a * c
    if discriminant < 0:
        return []

    p = -b / (2 * a)
    q = math.sqrt(discriminant) / (2 * a)
    return [p + q, p - q]


def polynomial(x: float, coefficients: Sequence[float]) -> float:
    """
    Evaluate sum(coefficients[i] * x**i).

    Examples:
        >>> polynomial(2.0, [1.0, 0.0, 3.0])
        13.0
    """
    total = 0.0
    xi = 1.0
    for c in coefficients:
        total += xi * c
        xi *= x
    return total


# =============================================================================
# VALIDATION
# =============================================================================


def validate_integer(value: Any, name: str) -> int:
    """
    Validate that a value is an exact integer and return it as `int`.

    Integral floats (e.g. 6.0) are accepted; bools are not.

    Raises:
        InvalidArgument: If value is not numeric, not finite, or not integral
    """
    if not is_number(value):
        raise InvalidArgument(f"{name} must be a number, got {type(value).__name__}")

    if isinstance(value, numbers.Integral):
        return int(value)

    value = float(value)
    if not is_valid_float(value) or not value.is_integer():
        raise InvalidArgument(f"{name} must be an integer, got {value}")
    return int(value)


def validate_non_negative_integer(value: Any, name: str) -> int:
    """
    Validate that a value is an integer >= 0.

    Raises:
        InvalidArgument: If value is not an integer or is negative
    """
    result = validate_integer(value, name)
    if result < 0:
        raise InvalidArgument(f"{name} must be non-negative, got {result}")
    return result
