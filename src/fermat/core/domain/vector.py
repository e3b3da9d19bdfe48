"""
Vector — Immutable n-dimensional vector

Immutable Pydantic model wrapping an owned, fixed-length tuple of floats.

LENGTH POLICY (add, subtract, product, dot):
    The result has the length of the longer operand; entries missing from the
    shorter operand count as 0.

DEGENERATE RESULTS:
    normalize() of a zero vector returns a vector of NaN entries and
    average() of an empty vector returns NaN. Callers must check for NaN.
"""

import math
from itertools import zip_longest
from typing import Iterable, Optional

from pydantic import BaseModel, Field

from fermat.core.math.exceptions import InvalidShape
from fermat.core.math.numerical_safeguards import nearly_equals, validate_non_negative_integer


class Vector(BaseModel):
    """n-dimensional vector of floats."""

    values: tuple[float, ...] = Field(default=(), description="Vector components")

    model_config = {"frozen": True}

    # -------------------------------------------------------------------------
    # Constructors

    @classmethod
    def of(cls, values: Iterable[float]) -> "Vector":
        """Build a vector from any iterable of numbers."""
        return cls(values=tuple(values))

    @classmethod
    def filled(cls, length: int, value: float = 0.0) -> "Vector":
        """Vector of `length` entries all equal to `value`."""
        n = validate_non_negative_integer(length, "length")
        return cls(values=(value,) * n)

    # -------------------------------------------------------------------------
    # Sequence access

    def __len__(self) -> int:
        return len(self.values)

    def __getitem__(self, index: int) -> float:
        return self.values[index]

    # -------------------------------------------------------------------------
    # Aggregates

    @property
    def total(self) -> float:
        return math.fsum(self.values)

    @property
    def average(self) -> float:
        if not self.values:
            return math.nan
        return self.total / len(self.values)

    @property
    def norm(self) -> float:
        """Euclidean norm."""
        return math.sqrt(sum(x * x for x in self.values))

    @property
    def min(self) -> float:
        return min(self.values)

    @property
    def max(self) -> float:
        return max(self.values)

    # -------------------------------------------------------------------------
    # Scaling

    def scale(self, q: float) -> "Vector":
        return Vector(values=tuple(q * x for x in self.values))

    def normalize(self) -> "Vector":
        """
        Unit vector in the same direction.

        Returns:
            self / norm; every entry is NaN if the norm is 0
        """
        norm = self.norm
        if norm == 0:
            return Vector(values=(math.nan,) * len(self.values))
        return Vector(values=tuple(x / norm for x in self.values))

    # -------------------------------------------------------------------------
    # Binary operations

    @staticmethod
    def _padded(v1: "Vector", v2: "Vector") -> Iterable[tuple[float, float]]:
        return zip_longest(v1.values, v2.values, fillvalue=0.0)

    def add(self, other: "Vector") -> "Vector":
        return Vector(values=tuple(a + b for a, b in Vector._padded(self, other)))

    def subtract(self, other: "Vector") -> "Vector":
        return Vector(values=tuple(a - b for a, b in Vector._padded(self, other)))

    def product(self, other: "Vector") -> "Vector":
        """Element-wise product."""
        return Vector(values=tuple(a * b for a, b in Vector._padded(self, other)))

    def dot(self, other: "Vector") -> float:
        return sum(a * b for a, b in Vector._padded(self, other))

    def cross2d(self, other: "Vector") -> float:
        """
        Scalar cross product of the first two components.

        Raises:
            InvalidShape: If either vector has fewer than 2 components
        """
        if len(self) < 2 or len(other) < 2:
            raise InvalidShape("2D cross product requires vectors of size >= 2")
        return self[0] * other[1] - self[1] * other[0]

    def cross(self, other: "Vector") -> "Vector":
        """
        Cross product of two 3-dimensional vectors.

        Raises:
            InvalidShape: If either vector is not of size 3
        """
        if len(self) != 3 or len(other) != 3:
            raise InvalidShape(
                f"Cross product requires vectors of size 3, got {len(self)} and {len(other)}"
            )
        a, b = self.values, other.values
        return Vector(
            values=(
                a[1] * b[2] - a[2] * b[1],
                a[2] * b[0] - a[0] * b[2],
                a[0] * b[1] - a[1] * b[0],
            )
        )

    def equals(self, other: "Vector", tol: Optional[float] = None) -> bool:
        """Tolerant component-wise equality; vectors of different size are never equal."""
        if len(self) != len(other):
            return False
        return all(nearly_equals(a, b, tol) for a, b in zip(self.values, other.values))

    def __add__(self, other: "Vector") -> "Vector":
        return self.add(other)

    def __sub__(self, other: "Vector") -> "Vector":
        return self.subtract(other)

    def __str__(self) -> str:
        return "(" + ", ".join(str(x) for x in self.values) + ")"
