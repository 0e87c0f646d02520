"""
Event — a group of participants sharing expenses

Event holds the descriptive attributes; EventData bundles everything the
storage layer keeps for one event (participants, activities and the last
computed settlements).
"""

from datetime import datetime

from pydantic import BaseModel, Field, model_validator

from splitledger.core.domain.activity import Activity
from splitledger.core.domain.participant import Participant
from splitledger.core.domain.settlement import Settlement


class Event(BaseModel):
    """
    Shared-expense event (trip, dinner, flat share...).

    Immutable model (frozen=True).
    """

    id: str = Field(..., min_length=1, description="Unique event id")
    name: str = Field(..., min_length=1, description="Event name")
    description: str | None = Field(None, description="Optional description")
    created_by: str = Field(..., min_length=1, description="Id of the creating user")
    created_at: datetime = Field(..., description="Creation time")
    updated_at: datetime = Field(..., description="Last modification time")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_updated_after_created(self) -> "Event":
        if self.updated_at < self.created_at:
            raise ValueError(
                f"updated_at {self.updated_at.isoformat()} is before "
                f"created_at {self.created_at.isoformat()}"
            )
        return self


class EventData(BaseModel):
    """
    Event with its participants, activities and settlements.

    Settlements are derived data: they are recomputed from scratch after
    every change (see splitledger.engine.recompute_event_data).
    """

    event: Event
    participants: list[Participant] = Field(default_factory=list)
    activities: list[Activity] = Field(default_factory=list)
    settlements: list[Settlement] = Field(default_factory=list)

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_event_membership(self) -> "EventData":
        """Participants and activities must belong to the bundled event"""
        event_id = self.event.id
        for participant in self.participants:
            if participant.event_id != event_id:
                raise ValueError(
                    f"Participant '{participant.id}' belongs to event "
                    f"'{participant.event_id}', expected '{event_id}'"
                )
        for activity in self.activities:
            if activity.event_id != event_id:
                raise ValueError(
                    f"Activity '{activity.id}' belongs to event "
                    f"'{activity.event_id}', expected '{event_id}'"
                )
        return self
