"""
MathConfig — Process-wide tolerance configuration

Every epsilon-based comparison in the library (nearly_equals, is_parallel,
Fraction convergence, Complex division-by-zero detection) reads its tolerance
from the active MathConfig unless an explicit `tol` is passed.

The active config is held in a ContextVar:
- set_config / set_precision replace it for the current context
  (at import time, for the whole process)
- using_precision temporarily overrides it inside a `with` block
"""

import math
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Final, Iterator, Optional

from fermat.core.math.exceptions import InvalidArgument

# =============================================================================
# DEFAULTS
# =============================================================================

# Default absolute tolerance for float comparisons
DEFAULT_TOLERANCE: Final[float] = 1e-6


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class MathConfig:
    """Tolerance settings shared by all epsilon-based operations."""

    tolerance: float = DEFAULT_TOLERANCE

    def __post_init__(self) -> None:
        if not math.isfinite(self.tolerance) or self.tolerance <= 0:
            raise InvalidArgument(
                f"tolerance must be a positive finite float, got {self.tolerance}"
            )


DEFAULT_CONFIG: Final[MathConfig] = MathConfig()

_ACTIVE_CONFIG: ContextVar[MathConfig] = ContextVar(
    "fermat_math_config", default=DEFAULT_CONFIG
)


def get_config() -> MathConfig:
    """Return the config active in the current context."""
    return _ACTIVE_CONFIG.get()


def set_config(config: MathConfig) -> None:
    """Replace the active config for the current context."""
    _ACTIVE_CONFIG.set(config)


def set_precision(tolerance: Optional[float] = None) -> MathConfig:
    """
    Set the active tolerance.

    Args:
        tolerance: New tolerance; None restores DEFAULT_TOLERANCE

    Returns:
        The newly active config

    Raises:
        InvalidArgument: If tolerance is not a positive finite float
    """
    config = MathConfig(tolerance=DEFAULT_TOLERANCE if tolerance is None else tolerance)
    set_config(config)
    return config


@contextmanager
def using_precision(tolerance: float) -> Iterator[MathConfig]:
    """
    Temporarily override the active tolerance.

    Examples:
        >>> with using_precision(1e-3):
        ...     nearly_equals(1.0, 1.0005)
        True
    """
    token = _ACTIVE_CONFIG.set(MathConfig(tolerance=tolerance))
    try:
        yield _ACTIVE_CONFIG.get()
    finally:
        _ACTIVE_CONFIG.reset(token)


def resolve_tolerance(tol: Optional[float] = None) -> float:
    """Explicit `tol` if given, otherwise the active config's tolerance."""
    if tol is None:
        return get_config().tolerance
    return tol
