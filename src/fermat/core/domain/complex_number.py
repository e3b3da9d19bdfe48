"""
Complex — Immutable complex number model

Immutable Pydantic model (frozen=True). All operations return new instances;
plain real operands are promoted to (x, 0).

Division by a divisor whose both components are within tolerance of zero
returns the sentinel Complex(inf, inf) instead of raising.
"""

import math
from typing import Optional, Union

from pydantic import BaseModel, Field

from fermat.core.math.numerical_safeguards import is_number, nearly_equals

ComplexLike = Union["Complex", float, int]


class Complex(BaseModel):
    """Complex number re + im·i."""

    re: float = Field(0.0, description="Real part")
    im: float = Field(0.0, description="Imaginary part")

    model_config = {"frozen": True}

    # -------------------------------------------------------------------------
    # Properties

    @property
    def magnitude(self) -> float:
        return math.sqrt(self.re * self.re + self.im * self.im)

    @property
    def phase(self) -> float:
        return math.atan2(self.im, self.re)

    @property
    def conjugate(self) -> "Complex":
        return Complex(re=self.re, im=-self.im)

    # -------------------------------------------------------------------------
    # Arithmetic

    @staticmethod
    def promote(value: ComplexLike) -> "Complex":
        """Wrap a real number as (value, 0); Complex values pass through."""
        if isinstance(value, Complex):
            return value
        if is_number(value):
            return Complex(re=float(value), im=0.0)
        raise TypeError(f"Cannot convert {type(value).__name__} to Complex")

    def add(self, other: ComplexLike) -> "Complex":
        o = Complex.promote(other)
        return Complex(re=self.re + o.re, im=self.im + o.im)

    def subtract(self, other: ComplexLike) -> "Complex":
        o = Complex.promote(other)
        return Complex(re=self.re - o.re, im=self.im - o.im)

    def multiply(self, other: ComplexLike) -> "Complex":
        o = Complex.promote(other)
        return Complex(
            re=self.re * o.re - self.im * o.im,
            im=self.im * o.re + self.re * o.im,
        )

    def divide(self, other: ComplexLike, tol: Optional[float] = None) -> "Complex":
        """
        Complex division.

        Args:
            other: Divisor
            tol: Zero-detection tolerance (default: active MathConfig tolerance)

        Returns:
            self / other, or Complex(inf, inf) if both components of the
            divisor are within `tol` of zero

        Examples:
            >>> Complex(re=1, im=1).divide(Complex())
            Complex(re=inf, im=inf)
        """
        o = Complex.promote(other)

        if nearly_equals(o.re, 0.0, tol) and nearly_equals(o.im, 0.0, tol):
            return Complex(re=math.inf, im=math.inf)

        denominator = o.re * o.re + o.im * o.im
        return Complex(
            re=(self.re * o.re + self.im * o.im) / denominator,
            im=(self.im * o.re - self.re * o.im) / denominator,
        )

    def __add__(self, other: ComplexLike) -> "Complex":
        return self.add(other)

    def __radd__(self, other: ComplexLike) -> "Complex":
        return Complex.promote(other).add(self)

    def __sub__(self, other: ComplexLike) -> "Complex":
        return self.subtract(other)

    def __rsub__(self, other: ComplexLike) -> "Complex":
        return Complex.promote(other).subtract(self)

    def __mul__(self, other: ComplexLike) -> "Complex":
        return self.multiply(other)

    def __rmul__(self, other: ComplexLike) -> "Complex":
        return Complex.promote(other).multiply(self)

    def __truediv__(self, other: ComplexLike) -> "Complex":
        return self.divide(other)

    def __rtruediv__(self, other: ComplexLike) -> "Complex":
        return Complex.promote(other).divide(self)

    def __neg__(self) -> "Complex":
        return Complex(re=-self.re, im=-self.im)

    def __str__(self) -> str:
        if not self.re:
            return f"{self.im}i"
        if not self.im:
            return f"{self.re}"
        return f"{self.re} + {self.im}i"
