"""Utility-account credential model."""

from pydantic import BaseModel, Field, SecretStr


class UtilAccountCredentials(BaseModel):
    """Service-owned account used to authenticate profile lookups."""

    username: str = Field(min_length=1)
    password: SecretStr = Field(min_length=1)
    did: str = Field(min_length=1)

    model_config = {"frozen": True, "extra": "ignore"}
