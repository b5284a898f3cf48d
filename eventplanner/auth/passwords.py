"""Password hashing and verification (bcrypt via passlib)."""

import logging
import os
from typing import Optional

from dotenv import load_dotenv
from passlib.context import CryptContext

load_dotenv()

logger = logging.getLogger(__name__)

# Lower rounds only for tests; bcrypt's minimum is 4.
BCRYPT_ROUNDS = int(os.getenv("BCRYPT_ROUNDS", "12"))

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=BCRYPT_ROUNDS)


def hash_password(password: str) -> str:
    """Hash a plaintext password with a fresh random salt."""
    return pwd_context.hash(password)


def verify_password(plain_password: Optional[str], hashed_password: Optional[str]) -> bool:
    """Return True iff plain_password matches hashed_password.

    Never raises: a missing password, a missing hash or a stored hash passlib
    cannot parse all count as a failed verification.
    """
    if not plain_password or not hashed_password:
        return False
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except (ValueError, TypeError) as e:
        logger.warning(f"Stored password hash could not be verified: {type(e).__name__}")
        return False
