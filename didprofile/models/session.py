"""Session models for com.atproto.server.createSession."""

from pydantic import BaseModel, Field


class SessionRequest(BaseModel):
    """Body of a createSession call."""

    identifier: str
    password: str


class Session(BaseModel):
    """Authenticated context returned by createSession."""

    access_token: str = Field(alias="accessJwt", min_length=1)
    did: str
    handle: str

    model_config = {"populate_by_name": True, "extra": "ignore"}
