"""Settlement engine configuration

One frozen config object is shared by the balance aggregator and the
settlement matcher. Defaults reproduce the reference behaviour:
- settlements of 0.01 or less are suppressed as floating-point residue
- reported amounts are rounded to cents, half away from zero
- an activity referencing an unknown participant fails the call
"""

from dataclasses import dataclass
from enum import Enum
from typing import Final

from splitledger.core.math.numerical_safeguards import (
    EPS_CONSERVATION_REL,
    EPS_MONEY,
    MONEY_DECIMAL_PLACES,
    RoundingMode,
    validate_positive,
)


# =============================================================================
# CONSTANTS
# =============================================================================

DEFAULT_SETTLEMENT_EPSILON: Final[float] = EPS_MONEY
DEFAULT_DECIMAL_PLACES: Final[int] = MONEY_DECIMAL_PLACES
DEFAULT_CONSERVATION_TOLERANCE: Final[float] = EPS_CONSERVATION_REL


class UnknownParticipantPolicy(str, Enum):
    """What to do when an activity references an id missing from the participant list"""

    REJECT = "reject"  # raise UnknownParticipantError
    EXTEND = "extend"  # admit the id with a zero opening balance, appended in first-seen order


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class EngineConfig:
    """Settlement engine configuration.

    Attributes:
        settlement_epsilon: a match is reported only if its unrounded amount exceeds this
        decimal_places: precision of reported amounts
        rounding_mode: tie-breaking policy for reported amounts
        unknown_participant_policy: handling of ids outside the participant list
        conservation_tolerance: allowed |sum(balances)|, relative to max(1, total volume)
    """

    settlement_epsilon: float = DEFAULT_SETTLEMENT_EPSILON
    decimal_places: int = DEFAULT_DECIMAL_PLACES
    rounding_mode: RoundingMode = RoundingMode.HALF_AWAY_FROM_ZERO
    unknown_participant_policy: UnknownParticipantPolicy = UnknownParticipantPolicy.REJECT
    conservation_tolerance: float = DEFAULT_CONSERVATION_TOLERANCE

    def __post_init__(self):
        validate_positive(self.settlement_epsilon, "settlement_epsilon")
        validate_positive(self.conservation_tolerance, "conservation_tolerance")
        if self.decimal_places < 0:
            raise ValueError(f"decimal_places must be non-negative, got {self.decimal_places}")
        # Any reported match must round to at least one unit of the last decimal place
        min_epsilon = 0.5 * 10 ** -self.decimal_places
        if self.settlement_epsilon < min_epsilon:
            raise ValueError(
                f"settlement_epsilon {self.settlement_epsilon} too small for "
                f"decimal_places={self.decimal_places}: amounts just above it would "
                f"round to 0 (minimum {min_epsilon})"
            )
        # Accept plain strings ("half_even", "extend") from config files
        object.__setattr__(self, "rounding_mode", RoundingMode(self.rounding_mode))
        object.__setattr__(
            self,
            "unknown_participant_policy",
            UnknownParticipantPolicy(self.unknown_participant_policy),
        )
