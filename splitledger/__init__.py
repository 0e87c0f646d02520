"""
splitledger — shared expense settlement engine

Given the participants of an event and the activities they paid for,
computes who must pay whom to settle all debts.

    >>> from splitledger import calculate_settlements
    >>> calculate_settlements(participants, activities)
"""

from splitledger.core.domain import (
    Activity,
    BalanceEntry,
    BalanceSheet,
    Event,
    EventData,
    Participant,
    Settlement,
)
from splitledger.core.errors import (
    ErrorKind,
    InvalidInputError,
    InvariantViolationError,
    PreconditionFailedError,
    SettlementError,
    UnknownParticipantError,
)
from splitledger.core.math import RoundingMode
from splitledger.engine import (
    BalanceAggregator,
    EngineConfig,
    SettlementEngine,
    SettlementMatcher,
    SettlementResult,
    UnknownParticipantPolicy,
    calculate_settlements,
    recompute_event_data,
)
from splitledger.utils.logger import logs

__version__ = "0.1.0"

__all__ = [
    # Domain
    "Activity",
    "BalanceEntry",
    "BalanceSheet",
    "Event",
    "EventData",
    "Participant",
    "Settlement",
    # Errors
    "ErrorKind",
    "SettlementError",
    "InvalidInputError",
    "UnknownParticipantError",
    "PreconditionFailedError",
    "InvariantViolationError",
    # Engine
    "EngineConfig",
    "RoundingMode",
    "UnknownParticipantPolicy",
    "BalanceAggregator",
    "SettlementMatcher",
    "SettlementEngine",
    "SettlementResult",
    "calculate_settlements",
    "recompute_event_data",
    # Logging
    "logs",
]
