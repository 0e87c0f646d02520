"""
Participant — a person taking part in an event

Immutable Pydantic model. Owned by the storage layer; the engine only reads
the id and relies on the order in which participants are supplied.
"""

from pydantic import BaseModel, Field


class Participant(BaseModel):
    """
    Event participant.

    Immutable model (frozen=True).
    """

    id: str = Field(..., min_length=1, description="Unique participant id")
    event_id: str = Field(..., min_length=1, description="Event the participant belongs to")

    # Display attributes
    name: str = Field(..., min_length=1, description="Display name")
    email: str | None = Field(None, description="Contact email (optional)")
    phone: str | None = Field(None, description="Contact phone (optional)")

    model_config = {"frozen": True}
