"""Inbound profile request model."""

from pydantic import BaseModel, Field, field_validator


class ProfileRequest(BaseModel):
    """Typed form of the invocation event. Only ``did`` is read."""

    did: str = Field(min_length=1)

    model_config = {"extra": "ignore"}

    @field_validator("did", mode="before")
    @classmethod
    def strip_did(cls, v):
        if isinstance(v, str):
            return v.strip()
        return v
