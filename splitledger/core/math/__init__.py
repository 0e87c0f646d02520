"""
Core math modules for splitledger

Float money primitives with stable, deterministic behaviour.
"""

from splitledger.core.math.numerical_safeguards import (
    # Epsilon constants
    EPS_CONSERVATION_REL,
    EPS_FLOAT_COMPARE_ABS,
    EPS_MONEY,
    MONEY_DECIMAL_PLACES,
    # Rounding
    RoundingMode,
    round_money,
    # NaN/Inf
    is_valid_float,
    # Tolerance tests
    is_positive,
    is_zero,
    # Validation
    validate_positive,
)

__all__ = [
    # Epsilon constants
    "EPS_CONSERVATION_REL",
    "EPS_FLOAT_COMPARE_ABS",
    "EPS_MONEY",
    "MONEY_DECIMAL_PLACES",
    # Rounding
    "RoundingMode",
    "round_money",
    # NaN/Inf
    "is_valid_float",
    # Tolerance tests
    "is_positive",
    "is_zero",
    # Validation
    "validate_positive",
]
