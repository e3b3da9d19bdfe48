"""
Geometry Operations — Measurements, Transforms, Equality, Intersections

Functions over the shape models in fermat.core.domain.geometry:
- distance / manhattan between points
- angle(a, b, c) at vertex b, normalized into [0, 2π)
- is_parallel with explicit handling of vertical and horizontal lines
- reflect / rotate / translate, dispatched on `shape.kind`; every case maps
  its points through one per-point transform
- same(a, b, unordered) tolerant structural equality
- intersect(*shapes) for point, line and circle pairs

Rect and Polygon intersections are not implemented and raise
UnsupportedIntersection.
"""

import math
from itertools import combinations
from typing import Callable, Optional

from fermat.core.domain.geometry import (
    ORIGIN,
    Circle,
    Line,
    Point,
    Polygon,
    Rect,
    Shape,
)
from fermat.core.math.exceptions import InvalidArgument, UnsupportedIntersection
from fermat.core.math.numerical_safeguards import TWO_PI, nearly_equals, square

PointTransform = Callable[[Point], Point]


# =============================================================================
# MEASUREMENTS
# =============================================================================


def distance(p1: Point, p2: Point) -> float:
    """Euclidean distance."""
    return math.sqrt(square(p1.x - p2.x) + square(p1.y - p2.y))


def manhattan(p1: Point, p2: Point) -> float:
    """Manhattan (taxicab) distance."""
    return abs(p1.x - p2.x) + abs(p1.y - p2.y)


def angle(a: Point, b: Point, c: Point) -> float:
    """
    Angle at vertex b, measured counter-clockwise from ray b→a to ray b→c.

    Returns:
        Angle in radians within [0, 2π)

    Examples:
        >>> angle(Point(x=1, y=0), ORIGIN, Point(x=0, y=1))  # π/2
        1.5707963267948966
    """
    phi_a = math.atan2(a.y - b.y, a.x - b.x)
    phi_c = math.atan2(c.y - b.y, c.x - b.x)
    phi = (phi_c - phi_a) % TWO_PI
    # A tiny negative difference wraps to exactly 2π in floating point
    if phi >= TWO_PI:
        phi = 0.0
    return phi


def is_parallel(l1: Line, l2: Line, tol: Optional[float] = None) -> bool:
    """
    Check whether two lines are parallel.

    Vertical lines (zero run) are handled before any slope is computed:
    - both vertical → True
    - both horizontal → True
    - exactly one vertical → False
    - otherwise slopes are compared with nearly_equals
    """
    x1 = l1.p2.x - l1.p1.x
    y1 = l1.p2.y - l1.p1.y
    x2 = l2.p2.x - l2.p1.x
    y2 = l2.p2.y - l2.p1.y

    vertical1 = nearly_equals(x1, 0.0, tol)
    vertical2 = nearly_equals(x2, 0.0, tol)

    if vertical1 and vertical2:
        return True
    if nearly_equals(y1, 0.0, tol) and nearly_equals(y2, 0.0, tol):
        return True
    if vertical1 or vertical2:
        return False
    return nearly_equals(y1 / x1, y2 / x2, tol)


# =============================================================================
# TRANSFORMS
# =============================================================================


def _map_points(shape: Shape, fn: PointTransform) -> Shape:
    """Apply a point transform to every defining point of a shape."""
    if shape.kind == "point":
        return fn(shape)
    if shape.kind == "line":
        return Line(p1=fn(shape.p1), p2=fn(shape.p2))
    if shape.kind == "circle":
        return Circle(c=fn(shape.c), r=shape.r)
    if shape.kind == "polygon":
        return Polygon(points=tuple(fn(p) for p in shape.points))
    if shape.kind == "rect":
        # A rotated or reflected rectangle is no longer axis-aligned
        return _map_points(shape.to_polygon(), fn)
    raise InvalidArgument(f"Unknown shape kind: {shape.kind!r}")


def _reflect_point(p: Point, line: Line) -> Point:
    v = line.p2.x - line.p1.x
    w = line.p2.y - line.p1.y

    x0 = p.x - line.p1.x
    y0 = p.y - line.p1.y

    mu = (v * y0 - w * x0) / (v * v + w * w)
    return Point(x=p.x + 2 * mu * w, y=p.y - 2 * mu * v)


def _rotate_point(p: Point, phi: float, center: Point) -> Point:
    x0 = p.x - center.x
    y0 = p.y - center.y
    cos, sin = math.cos(phi), math.sin(phi)
    return Point(x=x0 * cos - y0 * sin + center.x, y=x0 * sin + y0 * cos + center.y)


def reflect(shape: Shape, line: Line) -> Shape:
    """
    Reflect a shape across a line.

    Raises:
        InvalidArgument: If the line's two points coincide
    """
    if line.p1.x == line.p2.x and line.p1.y == line.p2.y:
        raise InvalidArgument("Cannot reflect across a line with identical points")
    return _map_points(shape, lambda p: _reflect_point(p, line))


def rotate(shape: Shape, phi: float, center: Point = ORIGIN) -> Shape:
    """Rotate a shape counter-clockwise by `phi` radians around `center`."""
    return _map_points(shape, lambda p: _rotate_point(p, phi, center))


def translate(shape: Shape, dx: float = 0.0, dy: float = 0.0) -> Shape:
    """Shift a shape by (dx, dy). Rects stay axis-aligned."""
    if shape.kind == "rect":
        return Rect(x=shape.x + dx, y=shape.y + dy, w=shape.w, h=shape.h)
    return _map_points(shape, lambda p: p.shift(dx, dy))


# =============================================================================
# EQUALITY
# =============================================================================


def _same_point(p1: Point, p2: Point, tol: Optional[float]) -> bool:
    return nearly_equals(p1.x, p2.x, tol) and nearly_equals(p1.y, p2.y, tol)


def _same_line(l1: Line, l2: Line, unordered: bool, tol: Optional[float]) -> bool:
    if _same_point(l1.p1, l2.p1, tol) and _same_point(l1.p2, l2.p2, tol):
        return True
    return (
        unordered
        and _same_point(l1.p1, l2.p2, tol)
        and _same_point(l1.p2, l2.p1, tol)
    )


def _same_polygon(a: Polygon, b: Polygon, unordered: bool, tol: Optional[float]) -> bool:
    n = len(a.points)
    if n != len(b.points):
        return False

    def matches(candidate: tuple[Point, ...]) -> bool:
        return all(_same_point(p, q, tol) for p, q in zip(a.points, candidate))

    if not unordered:
        return matches(b.points)

    # Any starting vertex, either orientation
    for points in (b.points, b.points[::-1]):
        for shift in range(n):
            if matches(points[shift:] + points[:shift]):
                return True
    return False


def same(a: Shape, b: Shape, unordered: bool = False, tol: Optional[float] = None) -> bool:
    """
    Tolerant structural equality of two shapes.

    Args:
        a, b: Shapes to compare; different kinds are never equal
        unordered: Lines may have swapped endpoints, polygons may start at any
            vertex and run in either direction
        tol: Coordinate tolerance (default: active MathConfig tolerance)
    """
    if a.kind != b.kind:
        return False

    if a.kind == "point":
        return _same_point(a, b, tol)
    if a.kind == "line":
        return _same_line(a, b, unordered, tol)
    if a.kind == "circle":
        return _same_point(a.c, b.c, tol) and nearly_equals(a.r, b.r, tol)
    if a.kind == "rect":
        return all(
            nearly_equals(getattr(a, f), getattr(b, f), tol) for f in ("x", "y", "w", "h")
        )
    if a.kind == "polygon":
        return _same_polygon(a, b, unordered, tol)
    raise InvalidArgument(f"Unknown shape kind: {a.kind!r}")


# =============================================================================
# INTERSECTIONS
# =============================================================================


def _point_point(p1: Point, p2: Point, tol: Optional[float]) -> list[Point]:
    return [p1] if _same_point(p1, p2, tol) else []


def _line_line(l1: Line, l2: Line, tol: Optional[float]) -> list[Point]:
    d1x = l1.p1.x - l1.p2.x
    d1y = l1.p1.y - l1.p2.y
    d2x = l2.p1.x - l2.p2.x
    d2y = l2.p1.y - l2.p2.y

    d = d1x * d2y - d1y * d2x
    if nearly_equals(d, 0.0, tol):
        return []  # parallel or coincident

    q1 = l1.p1.x * l1.p2.y - l1.p1.y * l1.p2.x
    q2 = l2.p1.x * l2.p2.y - l2.p1.y * l2.p2.x

    x = q1 * d2x - d1x * q2
    y = q1 * d2y - d1y * q2
    return [Point(x=x / d, y=y / d)]


def _line_circle(line: Line, circle: Circle, tol: Optional[float]) -> list[Point]:
    # Work relative to the circle's center
    x1, y1 = line.p1.x - circle.c.x, line.p1.y - circle.c.y
    x2, y2 = line.p2.x - circle.c.x, line.p2.y - circle.c.y

    dx, dy = x2 - x1, y2 - y1
    dr2 = square(dx) + square(dy)
    if dr2 == 0:
        raise InvalidArgument("Line is defined by two identical points")

    det = x1 * y2 - x2 * y1
    disc = square(circle.r) * dr2 - square(det)

    if nearly_equals(disc, 0.0, tol):
        return [circle.c.shift(det * dy / dr2, -det * dx / dr2)]
    if disc < 0:
        return []

    root = math.sqrt(disc)
    sgn = -1.0 if dy < 0 else 1.0
    xa, ya = det * dy / dr2, -det * dx / dr2
    xb, yb = sgn * dx * root / dr2, abs(dy) * root / dr2
    return [circle.c.shift(xa + xb, ya + yb), circle.c.shift(xa - xb, ya - yb)]


def _circle_circle(c1: Circle, c2: Circle, tol: Optional[float]) -> list[Point]:
    d = distance(c1.c, c2.c)

    if nearly_equals(d, 0.0, tol):
        return []  # concentric (identical circles have no discrete intersection)
    touching = nearly_equals(d, c1.r + c2.r, tol) or nearly_equals(
        d, abs(c1.r - c2.r), tol
    )
    if not touching and (d > c1.r + c2.r or d < abs(c1.r - c2.r)):
        return []  # separate, or one inside the other

    ux, uy = (c2.c.x - c1.c.x) / d, (c2.c.y - c1.c.y) / d
    a = (square(c1.r) - square(c2.r) + square(d)) / (2 * d)
    base = c1.c.shift(ux * a, uy * a)

    if touching:
        return [base]

    b = math.sqrt(max(square(c1.r) - square(a), 0.0))
    return [base.shift(uy * b, -ux * b), base.shift(-uy * b, ux * b)]


def _intersect_pair(a: Shape, b: Shape, tol: Optional[float]) -> list[Point]:
    pair = (a.kind, b.kind)

    if pair == ("point", "point"):
        return _point_point(a, b, tol)
    if pair == ("line", "line"):
        return _line_line(a, b, tol)
    if pair == ("line", "circle"):
        return _line_circle(a, b, tol)
    if pair == ("circle", "line"):
        return _line_circle(b, a, tol)
    if pair == ("circle", "circle"):
        return _circle_circle(a, b, tol)

    raise UnsupportedIntersection(f"Can't intersect {a.kind}s and {b.kind}s")


def intersect(*shapes: Shape, tol: Optional[float] = None) -> list[Point]:
    """
    Intersection points of two or more shapes.

    With more than two shapes, returns the concatenated intersections of
    every pair (in argument order).

    Raises:
        UnsupportedIntersection: For any pair involving a Rect or Polygon,
            or a Point with a non-Point
    """
    if len(shapes) < 2:
        return []
    results: list[Point] = []
    for a, b in combinations(shapes, 2):
        results.extend(_intersect_pair(a, b, tol))
    return results
