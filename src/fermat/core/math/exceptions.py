"""
Exceptions raised by fermat.

Argument-validation failures are raised at the call boundary. Degenerate
numeric results (division by a near-zero quantity) are NOT errors: they are
returned as inf/NaN sentinels so that chained arithmetic can propagate them.
"""


class FermatError(Exception):
    """Base class for all library errors."""


class InvalidArgument(FermatError, ValueError):
    """
    Argument of the wrong kind for the operation.

    Examples: a non-integer passed to factorial, a non-numeric value passed to
    is_prime, arithmetic on unset matrix cells.
    """


class ShapeMismatch(FermatError, ValueError):
    """Two matrices (or a matrix pair in a product) have incompatible dimensions."""


class InvalidShape(FermatError, ValueError):
    """
    The operation is undefined for the operand's shape.

    Examples: determinant or inverse of a non-square matrix, cross product of
    vectors that are not 3-dimensional.
    """


class UnsupportedIntersection(FermatError, NotImplementedError):
    """No intersection routine exists for this pair of shape kinds."""


class NoRootFound(FermatError, ArithmeticError):
    """Bisection could not bracket a sign change of the function."""
