"""SQLAlchemy database models for eventplanner."""

from datetime import datetime
from typing import Type, TypeVar, Union

from sqlalchemy import (
    BigInteger,
    Boolean,
    Column,
    Date,
    DateTime,
    ForeignKey,
    Integer,
    PrimaryKeyConstraint,
    String,
    Text,
    Time,
)

from eventplanner.database.database import Base
from eventplanner.models.event import DEFAULT_TIMEZONE, EventType, ParticipantStatus

T = TypeVar('T')

# SQLite only autoincrements INTEGER PRIMARY KEY columns.
IdType = BigInteger().with_variant(Integer, "sqlite")

# Largest value an IdType column holds.
MAX_ID = 2**63 - 1


def enum_to_value(enum_obj: Union[str, T]) -> str:
    """Convert enum to string value (handles both enum and string).

    Args:
        enum_obj: Enum instance or string value

    Returns:
        String value of the enum, or the string itself if already a string
    """
    if hasattr(enum_obj, 'value'):
        return enum_obj.value
    return str(enum_obj)


def value_to_enum(value: str, enum_class: Type[T], default: T) -> T:
    """Convert a stored name back to its enum, case-insensitively.

    Args:
        value: Stored string value
        enum_class: Enum class to convert to
        default: Default enum value if conversion fails

    Returns:
        Enum instance, or default if the stored value names no member
    """
    if not value:
        return default
    for member in enum_class:
        if member.value.lower() == value.lower():
            return member
    return default


def _timestamps(model) -> dict:
    # Explicit None would bypass the column defaults.
    out = {}
    if model.created_at is not None:
        out["created_at"] = model.created_at
    if model.updated_at is not None:
        out["updated_at"] = model.updated_at
    return out


class UserDB(Base):
    """Database model for User."""

    __tablename__ = "users"

    id = Column(IdType, primary_key=True, autoincrement=True)

    # User profile
    name = Column(String(255), nullable=False)
    email = Column(String(320), nullable=False, unique=True, index=True)
    password_hash = Column(String(255), nullable=False)

    # Timestamps
    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)
    updated_at = Column(DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow)

    def to_pydantic(self):
        """Convert database model to Pydantic model."""
        from eventplanner.models.user import User
        return User(
            id=self.id,
            name=self.name,
            email=self.email,
            password_hash=self.password_hash,
            created_at=self.created_at,
            updated_at=self.updated_at,
        )

    @classmethod
    def from_pydantic(cls, user):
        """Create database model from Pydantic model."""
        return cls(
            id=user.id,
            name=user.name,
            email=user.email,
            password_hash=user.password_hash,
            **_timestamps(user),
        )

    def apply(self, user) -> None:
        """Copy mutable fields from a Pydantic User onto this row."""
        self.name = user.name
        self.email = user.email
        if user.password_hash:
            self.password_hash = user.password_hash


class EventDB(Base):
    """Database model for Event."""

    __tablename__ = "events"

    id = Column(IdType, primary_key=True, autoincrement=True)

    # Owner
    user_id = Column(IdType, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)

    # Basic fields
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)

    # Span
    start_date = Column(Date, nullable=False, index=True)
    end_date = Column(Date, nullable=False, index=True)
    start_time = Column(Time, nullable=False)
    end_time = Column(Time, nullable=False)
    timezone = Column(String(255), nullable=False, default=DEFAULT_TIMEZONE)

    # Stored as the enum's canonical name
    event_type = Column(String(50), nullable=False, default=EventType.OTHER.value)

    # Timestamps
    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)
    updated_at = Column(DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow)

    def to_pydantic(self):
        """Convert database model to Pydantic model."""
        from eventplanner.models.event import Event
        return Event(
            id=self.id,
            user_id=self.user_id,
            title=self.title,
            description=self.description,
            start_date=self.start_date,
            end_date=self.end_date,
            start_time=self.start_time,
            end_time=self.end_time,
            timezone=self.timezone or DEFAULT_TIMEZONE,
            event_type=value_to_enum(self.event_type, EventType, EventType.OTHER),
            created_at=self.created_at,
            updated_at=self.updated_at,
        )

    @classmethod
    def from_pydantic(cls, event):
        """Create database model from Pydantic model."""
        return cls(
            id=event.id,
            user_id=event.user_id,
            title=event.title,
            description=event.description,
            start_date=event.start_date,
            end_date=event.end_date,
            start_time=event.start_time,
            end_time=event.end_time,
            timezone=event.timezone,
            event_type=enum_to_value(event.event_type),
            **_timestamps(event),
        )

    def apply(self, event) -> None:
        """Copy mutable fields from a Pydantic Event onto this row."""
        self.title = event.title
        self.description = event.description
        self.start_date = event.start_date
        self.end_date = event.end_date
        self.start_time = event.start_time
        self.end_time = event.end_time
        self.timezone = event.timezone
        self.event_type = enum_to_value(event.event_type)


class EventParticipantDB(Base):
    """Database model for EventParticipant (schema only)."""

    __tablename__ = "event_participants"
    __table_args__ = (
        PrimaryKeyConstraint("event_id", "user_id"),
    )

    event_id = Column(IdType, ForeignKey("events.id", ondelete="CASCADE"), nullable=False)
    user_id = Column(IdType, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    is_organizer = Column(Boolean, nullable=False, default=False)
    status = Column(String(50), nullable=False, default=ParticipantStatus.INVITED.value)

    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)
    updated_at = Column(DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow)

    def to_pydantic(self):
        """Convert database model to Pydantic model."""
        from eventplanner.models.event import EventParticipant
        return EventParticipant(
            event_id=self.event_id,
            user_id=self.user_id,
            is_organizer=self.is_organizer,
            status=value_to_enum(self.status, ParticipantStatus, ParticipantStatus.INVITED),
        )
