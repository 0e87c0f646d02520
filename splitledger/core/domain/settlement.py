"""
Settlement — a directed payment instruction

Produced by the engine, never persisted by it. Serialized with the keys
'from', 'to' and 'amount' (model_dump(by_alias=True)); 'from' is a Python
keyword, so the attributes are named from_id and to_id.
"""

from pydantic import BaseModel, Field, model_validator


class Settlement(BaseModel):
    """
    from_id must pay to_id the given amount.

    Immutable model (frozen=True).
    """

    from_id: str = Field(..., alias="from", min_length=1, description="Paying participant id")
    to_id: str = Field(..., alias="to", min_length=1, description="Receiving participant id")
    amount: float = Field(..., gt=0, description="Amount to pay (rounded, base unit)")

    model_config = {"frozen": True, "populate_by_name": True}

    @model_validator(mode="after")
    def validate_not_self_payment(self) -> "Settlement":
        """A participant never pays themselves"""
        if self.from_id == self.to_id:
            raise ValueError(f"Settlement from '{self.from_id}' to itself is not allowed")
        return self

    def to_record(self) -> dict:
        """Plain dict with the external key names ('from', 'to', 'amount')"""
        return self.model_dump(by_alias=True)
