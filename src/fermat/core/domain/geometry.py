"""
Geometry — Immutable 2D shape models

Immutable Pydantic models for Point, Line, Circle, Rect and Polygon. Each
model carries a literal `kind` tag; `Shape` is the discriminated union over
that tag, so a serialized shape (dict/JSON) validates back into the right
model and transforms can dispatch on `shape.kind`.
"""

import math
from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field, TypeAdapter

from fermat.core.math.exceptions import InvalidArgument
from fermat.core.math.numerical_safeguards import square


# =============================================================================
# POINT
# =============================================================================


class Point(BaseModel):
    """Point (x, y)."""

    kind: Literal["point"] = "point"
    x: float = Field(0.0, description="x coordinate")
    y: float = Field(0.0, description="y coordinate")

    model_config = {"frozen": True}

    @property
    def length(self) -> float:
        """Distance from the origin."""
        return math.hypot(self.x, self.y)

    @property
    def polar(self) -> tuple[float, float]:
        """(r, theta) with theta in [0, 2π)."""
        theta = math.atan2(self.y, self.x)
        if theta < 0:
            theta += 2 * math.pi
        return (self.length, theta)

    @classmethod
    def from_polar(cls, angle: float, r: float = 1.0) -> "Point":
        return cls(x=r * math.cos(angle), y=r * math.sin(angle))

    @staticmethod
    def average(*points: "Point") -> "Point":
        """
        Raises:
            InvalidArgument: If no points are given
        """
        n = len(points)
        if n == 0:
            raise InvalidArgument("average requires at least one point")
        return Point(x=sum(p.x for p in points) / n, y=sum(p.y for p in points) / n)

    def shift(self, dx: float = 0.0, dy: float = 0.0) -> "Point":
        return Point(x=self.x + dx, y=self.y + dy)

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


ORIGIN = Point(x=0.0, y=0.0)


# =============================================================================
# LINE
# =============================================================================


class Line(BaseModel):
    """Infinite straight line through p1 and p2."""

    kind: Literal["line"] = "line"
    p1: Point
    p2: Point

    model_config = {"frozen": True}

    @property
    def length(self) -> float:
        """Distance between the two defining points."""
        return math.hypot(self.p2.x - self.p1.x, self.p2.y - self.p1.y)

    @property
    def midpoint(self) -> Point:
        return Point.average(self.p1, self.p2)

    @property
    def slope(self) -> float:
        """Rise over run; ±inf (or NaN) for vertical lines."""
        dx = self.p2.x - self.p1.x
        dy = self.p2.y - self.p1.y
        if dx == 0:
            return math.copysign(math.inf, dy) if dy else math.nan
        return dy / dx


X_AXIS = Line(p1=ORIGIN, p2=Point(x=1.0, y=0.0))
Y_AXIS = Line(p1=ORIGIN, p2=Point(x=0.0, y=1.0))


# =============================================================================
# CIRCLE
# =============================================================================


class Circle(BaseModel):
    """Circle with center c and radius r."""

    kind: Literal["circle"] = "circle"
    c: Point = Field(default=ORIGIN, description="Center")
    r: float = Field(1.0, ge=0, description="Radius")

    model_config = {"frozen": True}

    @property
    def center(self) -> Point:
        return self.c

    @property
    def circumference(self) -> float:
        return 2 * math.pi * self.r

    @property
    def area(self) -> float:
        return math.pi * square(self.r)


# =============================================================================
# RECT
# =============================================================================


class Rect(BaseModel):
    """
    Axis-aligned rectangle with corner (x, y), width w and height h.

    w and h may be negative; area and circumference use absolute values.
    """

    kind: Literal["rect"] = "rect"
    x: float = 0.0
    y: float = 0.0
    w: float = 1.0
    h: float = 1.0

    model_config = {"frozen": True}

    @property
    def center(self) -> Point:
        return Point(x=self.x + self.w / 2, y=self.y + self.h / 2)

    @property
    def circumference(self) -> float:
        return 2 * abs(self.w) + 2 * abs(self.h)

    @property
    def area(self) -> float:
        return abs(self.w * self.h)

    def to_polygon(self) -> "Polygon":
        """The four corners, starting at (x, y)."""
        return Polygon(
            points=(
                Point(x=self.x, y=self.y),
                Point(x=self.x + self.w, y=self.y),
                Point(x=self.x + self.w, y=self.y + self.h),
                Point(x=self.x, y=self.y + self.h),
            )
        )


# =============================================================================
# POLYGON
# =============================================================================


class Polygon(BaseModel):
    """
    Closed polygon through `points` (the last point connects to the first).

    Area and circumference are only meaningful for simple
    (non-self-intersecting) polygons.
    """

    kind: Literal["polygon"] = "polygon"
    points: tuple[Point, ...] = Field(..., min_length=1, description="Vertices")

    model_config = {"frozen": True}

    @classmethod
    def of(cls, *coordinates: tuple[float, float]) -> "Polygon":
        """Polygon.of((0, 0), (1, 0), (1, 1))"""
        return cls(points=tuple(Point(x=x, y=y) for x, y in coordinates))

    @property
    def edges(self) -> list[Line]:
        p = self.points
        return [Line(p1=p[i - 1], p2=p[i]) for i in range(1, len(p))] + [
            Line(p1=p[-1], p2=p[0])
        ]

    @property
    def circumference(self) -> float:
        p = self.points
        n = len(p)
        return sum(math.hypot(p[i].x - p[i - 1].x, p[i].y - p[i - 1].y) for i in range(n))

    @property
    def signed_area(self) -> float:
        """Shoelace sum / 2; positive for counter-clockwise vertices."""
        p = self.points
        n = len(p)
        total = 0.0
        for i in range(n):
            a, b = p[i - 1], p[i]
            total += a.x * b.y - b.x * a.y
        return total / 2

    @property
    def area(self) -> float:
        return abs(self.signed_area)

    @property
    def centroid(self) -> Point:
        return Point.average(*self.points)


# =============================================================================
# TAGGED UNION
# =============================================================================

Shape = Annotated[
    Union[Point, Line, Circle, Rect, Polygon],
    Field(discriminator="kind"),
]

SHAPE_ADAPTER: TypeAdapter[Shape] = TypeAdapter(Shape)


def parse_shape(data: dict) -> Shape:
    """
    Validate a serialized shape into its model using the `kind` tag.

    Raises:
        pydantic.ValidationError: If the tag is unknown or fields are invalid
    """
    return SHAPE_ADAPTER.validate_python(data)
