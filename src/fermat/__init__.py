"""
fermat — Mathematics utilities for educational and interactive applications.

Numeric value types (Complex, Vector, Matrix, Fraction), 2D geometry,
number theory, combinatorics, probability, classical ciphers and bisection
root finding.
"""

import logging

from fermat.core.domain import (
    ORIGIN,
    Circle,
    Complex,
    Fraction,
    Line,
    Matrix,
    Point,
    Polygon,
    Rect,
    Shape,
    Vector,
    parse_shape,
    to_fraction,
)
from fermat.core.math import (
    FermatError,
    InvalidArgument,
    InvalidShape,
    MathConfig,
    NoRootFound,
    ShapeMismatch,
    UnsupportedIntersection,
    binomial,
    binomial_probability,
    bisect,
    caesar_cipher,
    factorial,
    gcd,
    get_config,
    is_prime,
    lcm,
    list_primes,
    nearly_equals,
    normal_probability,
    permutations,
    poisson_probability,
    prime_factorization,
    set_precision,
    subsets,
    using_precision,
    vigenere_cipher,
)
from fermat.core.math.geometry_ops import (
    angle,
    distance,
    intersect,
    is_parallel,
    manhattan,
    reflect,
    rotate,
    same,
    translate,
)

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Value types
    "Complex",
    "Vector",
    "Matrix",
    "Fraction",
    "to_fraction",
    # Geometry
    "ORIGIN",
    "Point",
    "Line",
    "Circle",
    "Rect",
    "Polygon",
    "Shape",
    "parse_shape",
    "angle",
    "distance",
    "intersect",
    "is_parallel",
    "manhattan",
    "reflect",
    "rotate",
    "same",
    "translate",
    # Configuration
    "MathConfig",
    "get_config",
    "set_precision",
    "using_precision",
    "nearly_equals",
    # Algorithms
    "binomial",
    "bisect",
    "factorial",
    "gcd",
    "is_prime",
    "lcm",
    "list_primes",
    "permutations",
    "prime_factorization",
    "subsets",
    # Probability and ciphers
    "binomial_probability",
    "normal_probability",
    "poisson_probability",
    "caesar_cipher",
    "vigenere_cipher",
    # Errors
    "FermatError",
    "InvalidArgument",
    "InvalidShape",
    "NoRootFound",
    "ShapeMismatch",
    "UnsupportedIntersection",
]
