"""Pydantic models for didprofile."""

from didprofile.models.credentials import UtilAccountCredentials
from didprofile.models.profile import Label, MuteListEntry, ProfileRecord, StrongRef, Viewer
from didprofile.models.request import ProfileRequest
from didprofile.models.session import Session, SessionRequest

__all__ = [
    "UtilAccountCredentials",
    "Label",
    "MuteListEntry",
    "ProfileRecord",
    "StrongRef",
    "Viewer",
    "ProfileRequest",
    "Session",
    "SessionRequest",
]
