"""JWT token generation and validation for eventplanner."""

import logging
import os
import uuid
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from functools import lru_cache
from typing import Dict, Optional

import jwt
from dotenv import load_dotenv

from eventplanner.exceptions import ConfigurationError
from eventplanner.models.auth import AuthResponse
from eventplanner.models.user import User

load_dotenv()

logger = logging.getLogger(__name__)

DEFAULT_EXPIRATION_SECONDS = 3600


@dataclass(frozen=True)
class JwtSettings:
    """Symmetric signing configuration shared by issuing and validation."""

    secret_key: str
    issuer: str
    audience: str
    expiration_seconds: int = DEFAULT_EXPIRATION_SECONDS
    algorithm: str = "HS256"

    @classmethod
    def from_env(cls) -> "JwtSettings":
        """Read JWT_* settings from the environment.

        Raises:
            ConfigurationError: If JWT_SECRET_KEY is not set
        """
        secret_key = os.getenv("JWT_SECRET_KEY")
        if not secret_key:
            raise ConfigurationError("JWT secret is not configured (set JWT_SECRET_KEY)")
        return cls(
            secret_key=secret_key,
            issuer=os.getenv("JWT_ISSUER", "eventplanner"),
            audience=os.getenv("JWT_AUDIENCE", "eventplanner-clients"),
            expiration_seconds=int(os.getenv("JWT_EXPIRATION_SECONDS", str(DEFAULT_EXPIRATION_SECONDS))),
            algorithm=os.getenv("JWT_ALGORITHM", "HS256"),
        )


@lru_cache(maxsize=1)
def get_jwt_settings() -> JwtSettings:
    """Process-wide JWT settings, read once."""
    return JwtSettings.from_env()


class TokenIssuer:
    """Signs and validates time-bound identity tokens."""

    def __init__(self, settings: JwtSettings):
        self.settings = settings

    def issue(self, user: User) -> AuthResponse:
        """Create a signed access token for a user.

        Claims: sub (user id as string), email, jti (unique per token),
        iat, exp, iss and aud.

        Args:
            user: Stored user (must have an id)

        Returns:
            AuthResponse with the token and its expiry in epoch seconds
        """
        now = datetime.now(timezone.utc)
        expires = now + timedelta(seconds=self.settings.expiration_seconds)
        payload = {
            "sub": str(user.id),
            "email": user.email,
            "jti": uuid.uuid4().hex,
            "iat": now,
            "exp": expires,
            "iss": self.settings.issuer,
            "aud": self.settings.audience,
        }
        token = jwt.encode(payload, self.settings.secret_key, algorithm=self.settings.algorithm)
        logger.debug(f"Issued token for user {user.id}")
        return AuthResponse(token=token, expires_at=int(expires.timestamp()))

    def decode(self, token: str) -> Optional[Dict]:
        """Decode and validate a token (signature, expiry, issuer, audience).

        Returns:
            Decoded claims, or None if the token is invalid or expired
        """
        try:
            return jwt.decode(
                token,
                self.settings.secret_key,
                algorithms=[self.settings.algorithm],
                audience=self.settings.audience,
                issuer=self.settings.issuer,
                options={"require": ["exp", "iss", "aud"]},
            )
        except jwt.ExpiredSignatureError:
            logger.info("Rejected expired token")
            return None
        except jwt.InvalidTokenError as e:
            logger.info(f"Rejected invalid token: {type(e).__name__}")
            return None
