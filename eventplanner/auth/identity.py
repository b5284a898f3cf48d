"""Resolve the caller's numeric user id from verified token claims."""

from typing import Any, Mapping, Optional

from eventplanner.database.models import MAX_ID
from eventplanner.exceptions import MalformedTokenError

SUBJECT_CLAIM = "sub"

# Tokens minted by older clients carry the id as a name identifier instead.
LEGACY_NAME_IDENTIFIER_CLAIMS = (
    "nameid",
    "http://schemas.xmlsoap.org/ws/2005/05/identity/claims/nameidentifier",
)


def _parse_positive_int(raw: Any) -> Optional[int]:
    if isinstance(raw, bool):
        return None
    if isinstance(raw, str):
        value = raw.strip()
        if not (value.isascii() and value.isdigit()) or len(value) > len(str(MAX_ID)):
            return None
        raw = int(value)
    if isinstance(raw, int) and 0 < raw <= MAX_ID:
        return raw
    return None


def resolve_user_id(claims: Mapping[str, Any]) -> int:
    """Extract the user id from the subject claim or its legacy fallback.

    Raises:
        MalformedTokenError: If no claim holds a positive integer id
    """
    raw = claims.get(SUBJECT_CLAIM)
    if raw in (None, ""):
        for claim in LEGACY_NAME_IDENTIFIER_CLAIMS:
            raw = claims.get(claim)
            if raw not in (None, ""):
                break
    user_id = _parse_positive_int(raw)
    if user_id is None:
        raise MalformedTokenError("Authenticated user missing numeric subject claim")
    return user_id
