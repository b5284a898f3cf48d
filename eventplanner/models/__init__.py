"""Data models for eventplanner."""

from eventplanner.models.event import (
    DEFAULT_TIMEZONE,
    Event,
    EventParticipant,
    EventRequest,
    EventType,
    EventUpdateRequest,
    ParticipantStatus,
)
from eventplanner.models.user import User, UserRequest, UserUpdateRequest
from eventplanner.models.auth import AuthResponse, LoginRequest

__all__ = [
    "DEFAULT_TIMEZONE",
    "Event",
    "EventParticipant",
    "EventRequest",
    "EventType",
    "EventUpdateRequest",
    "ParticipantStatus",
    "User",
    "UserRequest",
    "UserUpdateRequest",
    "AuthResponse",
    "LoginRequest",
]
