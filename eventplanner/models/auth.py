"""Authentication request/response models."""

from typing import Optional

from pydantic import BaseModel, Field


class LoginRequest(BaseModel):
    """Request model for password login."""
    email: str = Field(..., min_length=1)
    password: Optional[str] = None


class AuthResponse(BaseModel):
    """Signed token plus its absolute expiry (epoch seconds)."""

    token: str
    expires_at: int = Field(..., alias="expiresAt")

    class Config:
        """Pydantic configuration."""
        populate_by_name = True
