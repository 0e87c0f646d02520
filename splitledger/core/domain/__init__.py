"""
Domain models and value objects.

Contains the entities the engine consumes (Participant, Activity, Event)
and produces (BalanceSheet, Settlement).
"""

from splitledger.core.domain.activity import Activity
from splitledger.core.domain.balance import BalanceEntry, BalanceSheet
from splitledger.core.domain.event import Event, EventData
from splitledger.core.domain.participant import Participant
from splitledger.core.domain.settlement import Settlement

__all__ = [
    # Inputs
    "Participant",
    "Activity",
    "Event",
    "EventData",
    # Engine output
    "BalanceEntry",
    "BalanceSheet",
    "Settlement",
]
