"""
Domain models and value objects.

Immutable Pydantic models: Complex, Vector, Matrix, Fraction and the 2D
shapes Point, Line, Circle, Rect, Polygon.
"""

from fermat.core.domain.complex_number import Complex
from fermat.core.domain.fraction import DEFAULT_MAX_DENOMINATOR, Fraction, to_fraction
from fermat.core.domain.geometry import (
    ORIGIN,
    X_AXIS,
    Y_AXIS,
    Circle,
    Line,
    Point,
    Polygon,
    Rect,
    Shape,
    parse_shape,
)
from fermat.core.domain.matrix import Matrix
from fermat.core.domain.vector import Vector

__all__ = [
    # Numeric value types
    "Complex",
    "Vector",
    "Matrix",
    # Fractions
    "DEFAULT_MAX_DENOMINATOR",
    "Fraction",
    "to_fraction",
    # Geometry
    "ORIGIN",
    "X_AXIS",
    "Y_AXIS",
    "Point",
    "Line",
    "Circle",
    "Rect",
    "Polygon",
    "Shape",
    "parse_shape",
]
