"""Response models for the HTTP surface."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from eventplanner.models.user import User


class UserResponse(BaseModel):
    """Outbound user representation (never includes the password hash)."""
    id: int
    name: str
    email: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_user(cls, user: User) -> "UserResponse":
        return cls(
            id=user.id,
            name=user.name,
            email=user.email,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )


class ErrorResponse(BaseModel):
    """Error body returned for every failed request."""
    status_code: int = Field(..., alias="statusCode")
    message: str

    class Config:
        """Pydantic configuration."""
        populate_by_name = True
