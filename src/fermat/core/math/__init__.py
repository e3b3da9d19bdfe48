"""
Core math modules for fermat.

Scalar primitives, tolerance configuration, error taxonomy and the
combinatorial, number-theoretic, probability, cipher and root-finding
algorithms.

Import order matters: config and exceptions first, then the primitives that
depend on them.
"""

# Errors
from fermat.core.math.exceptions import (
    FermatError,
    InvalidArgument,
    InvalidShape,
    NoRootFound,
    ShapeMismatch,
    UnsupportedIntersection,
)

# Configuration
from fermat.core.math.config import (
    DEFAULT_CONFIG,
    DEFAULT_TOLERANCE,
    MathConfig,
    get_config,
    resolve_tolerance,
    set_config,
    set_precision,
    using_precision,
)

# Numerical Safeguards
from fermat.core.math.numerical_safeguards import (
    PHI,
    SQRT2,
    TWO_PI,
    clamp,
    cube,
    is_between,
    is_integer,
    is_number,
    is_valid_float,
    lerp,
    log,
    mod,
    nearly_equals,
    polynomial,
    quadratic,
    round_decimal,
    round_to,
    sign,
    square,
    validate_integer,
    validate_non_negative_integer,
)

# Number Theory
from fermat.core.math.number_theory import (
    SMALL_PRIMES,
    euler_phi,
    gcd,
    goldbach,
    is_prime,
    lcm,
    list_primes,
    prime_factorization,
    prime_factors,
)

# Combinatorics
from fermat.core.math.combinatorics import (
    Combinatorics,
    MemoCache,
    binomial,
    default_cache,
    factorial,
    permutations,
    subsets,
)

# Probability
from fermat.core.math.probability import (
    binomial_probability,
    conditional_probability,
    exponential_probability,
    geometric_cdf,
    geometric_probability,
    joint_probability,
    normal_probability,
    poisson_probability,
    uniform_probability,
)

# Cryptography
from fermat.core.math.cryptography import (
    ENGLISH_FREQUENCY,
    caesar_cipher,
    cipher_letter_frequency,
    letter_frequency,
    vigenere_cipher,
)

# Root Finding
from fermat.core.math.root_finding import (
    DEFAULT_PRECISION,
    MAX_BISECTION_ITERATIONS,
    MAX_BRACKET_DOUBLINGS,
    bisect,
)

__all__ = [
    # Errors
    "FermatError",
    "InvalidArgument",
    "InvalidShape",
    "NoRootFound",
    "ShapeMismatch",
    "UnsupportedIntersection",
    # Configuration
    "DEFAULT_CONFIG",
    "DEFAULT_TOLERANCE",
    "MathConfig",
    "get_config",
    "resolve_tolerance",
    "set_config",
    "set_precision",
    "using_precision",
    # Numerical Safeguards — Constants
    "PHI",
    "SQRT2",
    "TWO_PI",
    # Numerical Safeguards — Comparisons
    "is_between",
    "is_integer",
    "is_number",
    "is_valid_float",
    "nearly_equals",
    "sign",
    # Numerical Safeguards — Rounding, modulo, bounding
    "clamp",
    "mod",
    "round_decimal",
    "round_to",
    # Numerical Safeguards — Polynomials
    "cube",
    "lerp",
    "log",
    "polynomial",
    "quadratic",
    "square",
    # Numerical Safeguards — Validation
    "validate_integer",
    "validate_non_negative_integer",
    # Number Theory
    "SMALL_PRIMES",
    "euler_phi",
    "gcd",
    "goldbach",
    "is_prime",
    "lcm",
    "list_primes",
    "prime_factorization",
    "prime_factors",
    # Combinatorics
    "Combinatorics",
    "MemoCache",
    "binomial",
    "default_cache",
    "factorial",
    "permutations",
    "subsets",
    # Probability
    "binomial_probability",
    "conditional_probability",
    "exponential_probability",
    "geometric_cdf",
    "geometric_probability",
    "joint_probability",
    "normal_probability",
    "poisson_probability",
    "uniform_probability",
    # Cryptography
    "ENGLISH_FREQUENCY",
    "caesar_cipher",
    "cipher_letter_frequency",
    "letter_frequency",
    "vigenere_cipher",
    # Root Finding
    "DEFAULT_PRECISION",
    "MAX_BISECTION_ITERATIONS",
    "MAX_BRACKET_DOUBLINGS",
    "bisect",
]
