"""Event data models for eventplanner."""

from datetime import date, datetime, time
from enum import Enum
from typing import Any, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import BaseModel, Field, field_validator

from eventplanner.exceptions import BadRequestError

DEFAULT_TIMEZONE = "Asia/Kolkata"


class EventType(str, Enum):
    """Event type enumeration (stored as its canonical name)."""
    WORK = "Work"
    PERSONAL = "Personal"
    OTHER = "Other"

    @classmethod
    def parse(cls, value: Any) -> "EventType":
        """Parse an incoming value case-insensitively.

        Raises:
            BadRequestError: If the value names no event type
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            for member in cls:
                if member.value.lower() == value.strip().lower():
                    return member
        allowed = ", ".join(member.value for member in cls)
        raise BadRequestError(f"Invalid event type '{value}'. Allowed values: {allowed}")


class ParticipantStatus(str, Enum):
    """Invitation status of an event participant."""
    INVITED = "Invited"
    ACCEPTED = "Accepted"
    DECLINED = "Declined"
    TENTATIVE = "Tentative"


class Event(BaseModel):
    """A scheduled time span owned by exactly one user."""

    id: Optional[int] = Field(None, description="Event identifier (allocated by the database)")
    user_id: int = Field(..., description="Owning user ID")
    title: str = Field(..., max_length=255, description="Event title")
    description: Optional[str] = Field(None, description="Free-text description")
    start_date: date = Field(..., description="First day the event occupies")
    end_date: date = Field(..., description="Last day the event occupies")
    start_time: time = Field(..., description="Start time of day")
    end_time: time = Field(..., description="End time of day")
    timezone: str = Field(DEFAULT_TIMEZONE, description="IANA time zone identifier")
    event_type: EventType = Field(EventType.OTHER, description="Event type")
    created_at: Optional[datetime] = Field(None, description="Creation timestamp")
    updated_at: Optional[datetime] = Field(None, description="Last update timestamp")

    class Config:
        """Pydantic configuration."""
        use_enum_values = True


class EventParticipant(BaseModel):
    """Participant of an event. Schema only; no flow uses it yet."""

    event_id: int
    user_id: int
    is_organizer: bool = False
    status: ParticipantStatus = ParticipantStatus.INVITED

    class Config:
        """Pydantic configuration."""
        use_enum_values = True


def _parse_event_type_field(value: Any) -> Any:
    if value is None:
        return None
    try:
        return EventType.parse(value)
    except BadRequestError as e:
        raise ValueError(e.message)


def _check_timezone(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    try:
        ZoneInfo(value)
    except (ZoneInfoNotFoundError, ValueError):
        raise ValueError(f"Unknown time zone '{value}'")
    return value


def _check_local_time(value: Optional[time]) -> Optional[time]:
    # Times are wall-clock in the event's own timezone field.
    if value is not None and value.tzinfo is not None:
        raise ValueError("Time must not carry a UTC offset; use the timezone field")
    return value


class EventRequest(BaseModel):
    """Request body for creating an event."""

    title: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None
    start_date: date
    end_date: Optional[date] = Field(None, description="Defaults to start_date")
    start_time: time
    end_time: time
    timezone: Optional[str] = Field(None, description=f"Defaults to {DEFAULT_TIMEZONE}")
    event_type: Optional[EventType] = None

    @field_validator("event_type", mode="before")
    @classmethod
    def _validate_event_type(cls, v):
        return _parse_event_type_field(v)

    @field_validator("timezone")
    @classmethod
    def _validate_timezone(cls, v):
        return _check_timezone(v)

    @field_validator("start_time", "end_time")
    @classmethod
    def _validate_local_time(cls, v):
        return _check_local_time(v)


class EventUpdateRequest(BaseModel):
    """Partial update for an event; only non-null fields are applied."""

    title: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    start_time: Optional[time] = None
    end_time: Optional[time] = None
    timezone: Optional[str] = None
    event_type: Optional[EventType] = None

    @field_validator("event_type", mode="before")
    @classmethod
    def _validate_event_type(cls, v):
        return _parse_event_type_field(v)

    @field_validator("timezone")
    @classmethod
    def _validate_timezone(cls, v):
        return _check_timezone(v)

    @field_validator("start_time", "end_time")
    @classmethod
    def _validate_local_time(cls, v):
        return _check_local_time(v)


def event_from_request(user_id: int, request: EventRequest) -> Event:
    """Map a create request onto a new (unsaved) Event owned by user_id."""
    return Event(
        user_id=user_id,
        title=request.title,
        description=request.description,
        start_date=request.start_date,
        end_date=request.end_date or request.start_date,
        start_time=request.start_time,
        end_time=request.end_time,
        timezone=request.timezone or DEFAULT_TIMEZONE,
        event_type=request.event_type or EventType.OTHER,
    )


def merge_event_request(existing: Event, patch: EventUpdateRequest) -> Event:
    """Overwrite existing fields with every non-null field of the patch.

    id and user_id are never taken from the patch.
    """
    updates = {}
    if patch.title is not None:
        updates["title"] = patch.title
    if patch.description is not None:
        updates["description"] = patch.description
    if patch.start_date is not None:
        updates["start_date"] = patch.start_date
    if patch.end_date is not None:
        updates["end_date"] = patch.end_date
    if patch.start_time is not None:
        updates["start_time"] = patch.start_time
    if patch.end_time is not None:
        updates["end_time"] = patch.end_time
    if patch.timezone is not None:
        updates["timezone"] = patch.timezone
    if patch.event_type is not None:
        updates["event_type"] = EventType.parse(patch.event_type).value
    return existing.model_copy(update=updates)
