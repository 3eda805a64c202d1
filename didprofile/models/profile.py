"""Profile data models for app.bsky.actor.getProfile."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _WireModel(BaseModel):
    """camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


class Label(BaseModel):
    """Moderation label attached to an account or list."""

    version: int | None = Field(default=None, alias="ver")
    source: str | None = Field(default=None, alias="src")
    uri: str | None = None
    cid: str | None = None
    value: str | None = Field(default=None, alias="val")
    negated: bool | None = Field(default=None, alias="neg")
    created_timestamp: str | None = Field(default=None, alias="cts")
    expiry_timestamp: str | None = Field(default=None, alias="exp")
    # Raw bytes are encoded as {"$bytes": "<base64>"}
    signature: Any | None = Field(default=None, alias="sig")

    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class MuteListEntry(_WireModel):
    """Basic view of a moderation list that mutes the profile."""

    uri: str
    cid: str
    name: str
    purpose: str
    avatar: str | None = None
    list_item_count: int | None = None
    indexed_at: str | None = None
    labels: list[Label] | None = None


class StrongRef(_WireModel):
    """Reference to a specific record version."""

    uri: str
    cid: str


class Viewer(_WireModel):
    """Relationship between the authenticated account and the profile."""

    muted: bool = False
    # Lists as documented; a lone object from older servers is kept as sent
    muted_by_list: list[MuteListEntry] | MuteListEntry | None = None
    blocked_by: bool | None = None
    blocking: str | None = None
    following: str | None = None
    followed_by: str | None = None


class ProfileRecord(_WireModel):
    """
    Public view of an account as returned by the identity service.

    Optional fields stay None when the upstream omitted them; use
    ``model_dump(by_alias=True, exclude_unset=True)`` to reproduce the
    upstream shape.
    """

    did: str = ""
    handle: str = ""
    display_name: str | None = None
    description: str | None = None
    avatar: str | None = None
    banner: str | None = None
    followers_count: int | None = None
    follows_count: int | None = None
    posts_count: int | None = None
    pinned_post: StrongRef | None = None
    indexed_at: str | None = None
    created_at: str | None = None
    viewer: Viewer | None = None
    labels: list[Label] | None = None

    def is_empty(self) -> bool:
        """True when the record does not identify any account."""
        return not self.did.strip()
