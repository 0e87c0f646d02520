"""
Contract Validation Module

Validation of raw JSON records (participant, activity, settlement,
event_data) against the package's JSON Schema contracts.
"""

from .validators import (
    ActivityValidator,
    ContractValidator,
    EventDataValidator,
    ParticipantValidator,
    SchemaLoader,
    SettlementValidator,
    validate_activity,
    validate_event_data,
    validate_participant,
    validate_settlement,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "ParticipantValidator",
    "ActivityValidator",
    "SettlementValidator",
    "EventDataValidator",
    # Functions
    "validate_participant",
    "validate_activity",
    "validate_settlement",
    "validate_event_data",
]
