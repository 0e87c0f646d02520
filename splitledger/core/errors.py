"""
Settlement errors

Every failure raised by the engine carries an ErrorKind tag so callers can
branch on the category without parsing messages:

- INVALID_INPUT: the input data is inconsistent (duplicate or unknown ids)
- PRECONDITION_FAILED: an activity cannot be split (no sharers, bad amount)
- INTERNAL_INVARIANT_VIOLATION: the engine itself produced an inconsistent
  state (balances do not sum to zero, unmatched debt). Indicates a defect.
"""

from enum import Enum


class ErrorKind(str, Enum):
    """Category of a settlement failure"""

    INVALID_INPUT = "invalid_input"
    PRECONDITION_FAILED = "precondition_failed"
    INTERNAL_INVARIANT_VIOLATION = "internal_invariant_violation"


class SettlementError(Exception):
    """
    Base class for all engine failures.

    Attributes:
        kind: Error category
        message: Human readable description
    """

    kind: ErrorKind = ErrorKind.INVALID_INPUT

    def __init__(self, message: str, kind: ErrorKind | None = None):
        super().__init__(message)
        self.message = message
        if kind is not None:
            self.kind = kind

    def __str__(self) -> str:
        return f"[{self.kind.value}] {self.message}"


class InvalidInputError(SettlementError):
    """Inconsistent participant or activity data."""

    kind = ErrorKind.INVALID_INPUT


class UnknownParticipantError(InvalidInputError):
    """An activity references a participant id that is not part of the event."""

    def __init__(self, participant_id: str, activity_id: str):
        super().__init__(
            f"Activity '{activity_id}' references unknown participant '{participant_id}'"
        )
        self.participant_id = participant_id
        self.activity_id = activity_id


class PreconditionFailedError(SettlementError):
    """An activity cannot be split (empty sharer list, non-positive or NaN amount)."""

    kind = ErrorKind.PRECONDITION_FAILED


class InvariantViolationError(SettlementError):
    """
    Internal consistency check failed.

    Raised when the aggregated balances do not sum to zero or when a debtor
    is left with debt that no creditor can absorb. Never expected on valid
    input.
    """

    kind = ErrorKind.INTERNAL_INVARIANT_VIOLATION
