"""
Numerical Safeguards — Safe Money Primitives

All money amounts inside the engine are plain floats in the event's base
unit. This module keeps float handling in one place:
- NaN/Inf detection so invalid values never reach a balance
- Tolerance tests used by the conservation and residue checks
- Fixed-point rounding of reported amounts (cents)
- Validation helpers that raise ValueError with a readable message

CRITICAL INVARIANTS:
1. NaN/Inf never propagate into balances (rejected by validators)
2. Float comparisons always use an explicit tolerance
3. Rounding is applied once, to reported values only; round_money is idempotent
4. All operations are deterministic and reproducible
"""

import math
from decimal import ROUND_HALF_EVEN, ROUND_HALF_UP, Decimal
from enum import Enum
from typing import Final

# =============================================================================
# EPSILON PARAMETERS
# =============================================================================

# Smallest settlement worth reporting (one cent in the reference unit).
# Amounts at or below it are treated as floating-point residue.
EPS_MONEY: Final[float] = 0.01

# Relative tolerance for the balance conservation check
# (sum of balances vs. total expense volume)
EPS_CONSERVATION_REL: Final[float] = 1e-6

# Default tolerance for sign and zero tests
EPS_FLOAT_COMPARE_ABS: Final[float] = 1e-12

# Number of decimal places in a reported amount
MONEY_DECIMAL_PLACES: Final[int] = 2


# =============================================================================
# ROUNDING MODES
# =============================================================================


class RoundingMode(str, Enum):
    """Rounding policy for reported amounts"""

    HALF_AWAY_FROM_ZERO = "half_away_from_zero"  # 2.675 -> 2.68, -2.675 -> -2.68
    HALF_EVEN = "half_even"  # banker's rounding: 2.665 -> 2.66


_DECIMAL_ROUNDING: Final[dict[RoundingMode, str]] = {
    RoundingMode.HALF_AWAY_FROM_ZERO: ROUND_HALF_UP,
    RoundingMode.HALF_EVEN: ROUND_HALF_EVEN,
}


# =============================================================================
# NaN/Inf CHECKS
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Check that a float is finite (not NaN, not Inf).

    Args:
        value: Value to check

    Returns:
        True if the value is finite
    """
    return math.isfinite(value)


# =============================================================================
# EPSILON COMPARISONS
# =============================================================================


def is_zero(value: float, tol: float = EPS_FLOAT_COMPARE_ABS) -> bool:
    """True if abs(value) <= tol"""
    return abs(value) <= tol


def is_positive(value: float, tol: float = EPS_FLOAT_COMPARE_ABS) -> bool:
    """True if value > tol"""
    return value > tol


# =============================================================================
# FIXED-POINT ROUNDING
# =============================================================================


def round_money(
    value: float,
    places: int = MONEY_DECIMAL_PLACES,
    mode: RoundingMode = RoundingMode.HALF_AWAY_FROM_ZERO,
) -> float:
    """
    Round an amount to a fixed number of decimal places.

    The float is converted through its shortest repr (str), so 2.675 is
    rounded as the decimal 2.675 the caller sees and not as its binary
    approximation 2.67499999...

    Rounding an already-rounded value returns it unchanged.

    Args:
        value: Amount to round
        places: Number of decimal places (default: 2, cents)
        mode: Tie-breaking policy (default: half away from zero)

    Returns:
        Rounded amount as float

    Raises:
        ValueError: If value is NaN/Inf or places is negative

    Examples:
        >>> round_money(3.3333333)
        3.33
        >>> round_money(2.675)
        2.68
        >>> round_money(2.665, mode=RoundingMode.HALF_EVEN)
        2.66
    """
    if not is_valid_float(value):
        raise ValueError(f"Cannot round NaN/Inf amount: {value}")

    if places < 0:
        raise ValueError(f"places must be non-negative, got {places}")

    quantum = Decimal(1).scaleb(-places)
    rounded = Decimal(str(value)).quantize(quantum, rounding=_DECIMAL_ROUNDING[mode])
    return float(rounded)


# =============================================================================
# VALIDATION
# =============================================================================


def validate_positive(value: float, name: str) -> None:
    """
    Validate that a value is a finite, strictly positive float.

    Args:
        value: Value to check
        name: Parameter name (for the error message)

    Raises:
        ValueError: If value <= 0 or NaN/Inf
    """
    if not is_valid_float(value):
        raise ValueError(f"{name} must be a valid float (not NaN/Inf), got {value}")

    if value <= 0:
        raise ValueError(f"{name} must be positive, got {value}")
