"""
Fraction — Continued-fraction rational approximation

Immutable Pydantic model for numerator/denominator pairs, produced from
decimals by continued-fraction expansion (to_fraction).

IRRATIONAL FALLBACK:
    If no convergent with denominator <= max_denominator lies within tolerance
    of the decimal, the result is Fraction(numerator=decimal, denominator=1,
    irrational=True). Arithmetic with such a value yields another irrational
    pseudo-fraction holding the decimal result.
"""

import math
from typing import Final, Optional, Union

from pydantic import BaseModel, Field

from fermat.core.math.exceptions import InvalidArgument
from fermat.core.math.numerical_safeguards import is_number, is_valid_float, nearly_equals

# Default bound for convergent denominators
DEFAULT_MAX_DENOMINATOR: Final[int] = 1000

# Remainders below this are treated as an exhausted expansion
REMAINDER_EPS: Final[float] = 1e-12

FractionLike = Union["Fraction", int, float]


class Fraction(BaseModel):
    """Fraction numerator/denominator with a positive denominator."""

    numerator: Union[int, float] = Field(..., description="Numerator")
    denominator: int = Field(1, gt=0, description="Denominator (always positive)")
    irrational: bool = Field(
        False, description="True if no rational approximation was found"
    )

    model_config = {"frozen": True}

    # =========================================================================
    # PROPERTIES
    # =========================================================================

    @property
    def decimal(self) -> float:
        return self.numerator / self.denominator

    @property
    def sign(self) -> int:
        if self.numerator == 0:
            return 0
        return 1 if self.numerator > 0 else -1

    @property
    def simplified(self) -> "Fraction":
        """Reduced to lowest terms. Irrational values are returned as is."""
        if self.irrational or not isinstance(self.numerator, int):
            return self
        factor = math.gcd(self.numerator, self.denominator)
        return Fraction(
            numerator=self.numerator // factor,
            denominator=self.denominator // factor,
        )

    @property
    def inverse(self) -> "Fraction":
        """
        Reciprocal, keeping the denominator positive.

        Raises:
            InvalidArgument: If the fraction is zero
        """
        if self.numerator == 0:
            raise InvalidArgument("Zero has no inverse")
        if self.irrational:
            return _irrational(1 / self.decimal)
        s = self.sign
        return Fraction(numerator=s * self.denominator, denominator=abs(self.numerator))

    def as_tuple(self) -> tuple[Union[int, float], int]:
        return (self.numerator, self.denominator)

    # =========================================================================
    # CONSTRUCTORS
    # =========================================================================

    @classmethod
    def from_decimal(
        cls,
        decimal: float,
        max_denominator: int = DEFAULT_MAX_DENOMINATOR,
        tol: Optional[float] = None,
    ) -> "Fraction":
        return to_fraction(decimal, max_denominator=max_denominator, tol=tol)

    @classmethod
    def from_string(cls, s: str) -> "Fraction":
        """
        Parse "a/b" or a decimal string.

        Non-integral parts ("1.5/2") are approximated via to_fraction.

        Raises:
            InvalidArgument: On malformed input or a zero denominator
        """
        text = s.strip().replace("–", "-")
        try:
            if "/" not in text:
                return to_fraction(float(text))
            num_text, den_text = text.split("/", 1)
            num, den = float(num_text), float(den_text)
        except ValueError as e:
            raise InvalidArgument(f"Cannot parse fraction from {s!r}") from e

        if not is_valid_float(num) or not is_valid_float(den) or den == 0:
            raise InvalidArgument(f"Cannot parse fraction from {s!r}")
        if num.is_integer() and den.is_integer():
            sign = -1 if den < 0 else 1
            return cls(numerator=sign * int(num), denominator=abs(int(den)))
        return to_fraction(num / den)

    # =========================================================================
    # ARITHMETIC
    # =========================================================================

    @staticmethod
    def promote(value: FractionLike) -> "Fraction":
        if isinstance(value, Fraction):
            return value
        if isinstance(value, int) and not isinstance(value, bool):
            return Fraction(numerator=value)
        if is_number(value):
            return to_fraction(float(value))
        raise TypeError(f"Cannot convert {type(value).__name__} to Fraction")

    def add(self, other: FractionLike) -> "Fraction":
        o = Fraction.promote(other)
        if self.irrational or o.irrational:
            return _irrational(self.decimal + o.decimal)
        return Fraction(
            numerator=self.numerator * o.denominator + o.numerator * self.denominator,
            denominator=self.denominator * o.denominator,
        ).simplified

    def subtract(self, other: FractionLike) -> "Fraction":
        o = Fraction.promote(other)
        if self.irrational or o.irrational:
            return _irrational(self.decimal - o.decimal)
        return Fraction(
            numerator=self.numerator * o.denominator - o.numerator * self.denominator,
            denominator=self.denominator * o.denominator,
        ).simplified

    def multiply(self, other: FractionLike) -> "Fraction":
        o = Fraction.promote(other)
        if self.irrational or o.irrational:
            return _irrational(self.decimal * o.decimal)
        return Fraction(
            numerator=self.numerator * o.numerator,
            denominator=self.denominator * o.denominator,
        ).simplified

    def divide(self, other: FractionLike) -> "Fraction":
        """
        Raises:
            InvalidArgument: If the divisor is zero
        """
        return self.multiply(Fraction.promote(other).inverse)

    def __add__(self, other: FractionLike) -> "Fraction":
        return self.add(other)

    def __sub__(self, other: FractionLike) -> "Fraction":
        return self.subtract(other)

    def __mul__(self, other: FractionLike) -> "Fraction":
        return self.multiply(other)

    def __truediv__(self, other: FractionLike) -> "Fraction":
        return self.divide(other)

    def __float__(self) -> float:
        return float(self.decimal)

    def __str__(self) -> str:
        minus = "–" if self.sign < 0 else ""
        if self.denominator == 1:
            return f"{minus}{abs(self.numerator)}"
        return f"{minus}{abs(self.numerator)}/{self.denominator}"


def _irrational(decimal: float) -> Fraction:
    return Fraction(numerator=decimal, denominator=1, irrational=True)


# =============================================================================
# CONTINUED FRACTIONS
# =============================================================================


def to_fraction(
    decimal: float,
    max_denominator: int = DEFAULT_MAX_DENOMINATOR,
    tol: Optional[float] = None,
) -> Fraction:
    """
    Approximate a decimal by a convergent of its continued fraction.

    Convergents h_k / k_k are built with
        h_k = a_k * h_{k-1} + h_{k-2}
        k_k = a_k * k_{k-1} + k_{k-2}
    and the first one within `tol` of `decimal` is returned.

    Args:
        decimal: Value to approximate
        max_denominator: Largest denominator accepted (default: 1000)
        tol: Convergence tolerance (default: active MathConfig tolerance)

    Returns:
        Fraction with denominator <= max_denominator, or the irrational
        fallback Fraction(decimal, 1, irrational=True)

    Raises:
        InvalidArgument: If decimal is NaN/Inf or max_denominator < 1

    Examples:
        >>> to_fraction(0.5).as_tuple()
        (1, 2)
        >>> to_fraction(0.66, max_denominator=100).as_tuple()
        (33, 50)
        >>> to_fraction(math.pi, max_denominator=10).irrational
        True
    """
    if not is_valid_float(decimal):
        raise InvalidArgument(f"decimal must be finite, got {decimal}")
    if max_denominator < 1:
        raise InvalidArgument(f"max_denominator must be >= 1, got {max_denominator}")

    # (h_{k-1}, h_{k-2}) and (k_{k-1}, k_{k-2})
    n0, n1 = 1, 0
    d0, d1 = 0, 1

    a = math.floor(decimal)
    rem = decimal - a

    while d0 <= max_denominator:
        if d0 and nearly_equals(n0 / d0, decimal, tol):
            return Fraction(numerator=n0, denominator=d0)

        n0, n1 = a * n0 + n1, n0
        d0, d1 = a * d0 + d1, d0

        # Expansion terminated: the convergent just built is exact
        if rem < REMAINDER_EPS:
            if d0 <= max_denominator:
                return Fraction(numerator=n0, denominator=d0)
            break

        a = math.floor(1 / rem)
        rem = 1 / rem - a

    return _irrational(decimal)
