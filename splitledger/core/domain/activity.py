"""
Activity — a single shared expense

Immutable Pydantic model. One participant (paid_by) pays the full amount,
which is then split equally among the listed sharers (participants).
The payer may or may not be one of the sharers: a payer who is not listed
fronts the money and owes nothing for it.
"""

from datetime import datetime

from pydantic import BaseModel, Field, field_validator

from splitledger.core.math.numerical_safeguards import is_valid_float


class Activity(BaseModel):
    """
    Shared expense paid by one participant.

    Immutable model (frozen=True).
    """

    # Identification
    id: str = Field(..., min_length=1, description="Unique activity id")
    event_id: str = Field(..., min_length=1, description="Event the activity belongs to")
    description: str = Field("", description="Free-form description (e.g. 'Dinner')")

    # Money
    amount: float = Field(..., gt=0, description="Total amount paid, in the event's base unit")
    paid_by: str = Field(..., min_length=1, description="Id of the paying participant")
    participants: list[str] = Field(
        ..., min_length=1, description="Ids of the participants sharing the cost (ordered)"
    )

    created_at: datetime | None = Field(None, description="Creation time (optional)")

    model_config = {"frozen": True}

    @field_validator("amount")
    @classmethod
    def validate_amount_finite(cls, v: float) -> float:
        """NaN/Inf would poison every balance it touches"""
        if not is_valid_float(v):
            raise ValueError(f"amount must be finite, got {v}")
        return v

    @field_validator("participants")
    @classmethod
    def validate_unique_participants(cls, v: list[str]) -> list[str]:
        """Each sharer is debited exactly once per activity"""
        seen: set[str] = set()
        for pid in v:
            if not pid:
                raise ValueError("participant ids must be non-empty")
            if pid in seen:
                raise ValueError(f"participant '{pid}' listed more than once")
            seen.add(pid)
        return v

    def share(self) -> float:
        """
        Equal per-sharer portion of the amount.

        Returns:
            amount / number of sharers
        """
        return self.amount / len(self.participants)
