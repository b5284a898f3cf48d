"""User data models for eventplanner."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class User(BaseModel):
    """User model for eventplanner."""

    id: Optional[int] = Field(None, description="User identifier (allocated by the database)")
    name: str = Field(..., max_length=255, description="User display name")
    email: str = Field(..., max_length=320, description="Unique email address (exact match)")
    password_hash: Optional[str] = Field(None, description="bcrypt hash; never the plaintext")
    created_at: Optional[datetime] = Field(None, description="User creation timestamp")
    updated_at: Optional[datetime] = Field(None, description="User last update timestamp")


class UserRequest(BaseModel):
    """Request body for registering or creating a user."""

    name: str = Field(..., min_length=1, max_length=255)
    email: str = Field(..., min_length=3, max_length=320)
    password: str = Field(..., min_length=1)


class UserUpdateRequest(BaseModel):
    """Partial self-service update; only non-null fields are applied."""

    name: Optional[str] = Field(None, min_length=1, max_length=255)
    email: Optional[str] = Field(None, min_length=3, max_length=320)
    password: Optional[str] = Field(None, min_length=1)


def merge_user_request(existing: User, patch: UserUpdateRequest, password_hash: Optional[str] = None) -> User:
    """Overwrite name/email from the patch and swap in a freshly computed hash.

    The plaintext password on the patch is ignored here; callers hash it and
    pass the result as password_hash.
    """
    updates = {}
    if patch.name is not None:
        updates["name"] = patch.name
    if patch.email is not None:
        updates["email"] = patch.email
    if password_hash is not None:
        updates["password_hash"] = password_hash
    return existing.model_copy(update=updates)
