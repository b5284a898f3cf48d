"""FastAPI dependencies for authentication.

`authenticate_request` is installed as an application-wide dependency and
runs before every route. Routes decorated with `allow_anonymous` skip it;
every other route must carry a valid bearer token whose subject resolves to
a numeric user id. The resolved id is stored on `request.state.user_id`
for `get_current_user_id` to read.
"""

import logging
from typing import Callable, Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from eventplanner.auth.identity import resolve_user_id
from eventplanner.auth.jwt import TokenIssuer, get_jwt_settings
from eventplanner.exceptions import InvalidCredentialsError, MalformedTokenError

logger = logging.getLogger(__name__)

# HTTP Bearer token security scheme
security = HTTPBearer(auto_error=False)


def allow_anonymous(endpoint: Callable) -> Callable:
    """Mark a route endpoint as public (no token required)."""
    endpoint.allow_anonymous = True
    return endpoint


def is_anonymous_endpoint(request: Request) -> bool:
    endpoint = request.scope.get("endpoint")
    if endpoint is None:
        endpoint = getattr(request.scope.get("route"), "endpoint", None)
    return bool(getattr(endpoint, "allow_anonymous", False))


def get_token_issuer() -> TokenIssuer:
    return TokenIssuer(get_jwt_settings())


def authenticate_request(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    token_issuer: TokenIssuer = Depends(get_token_issuer),
) -> Optional[int]:
    """Resolve the caller's identity for one request.

    Returns:
        The caller's user id, or None for anonymous routes

    Raises:
        InvalidCredentialsError: If the token is missing or fails validation
        MalformedTokenError: If the token has no numeric subject claim
    """
    request.state.user_id = None
    if is_anonymous_endpoint(request):
        return None

    claims = token_issuer.decode(credentials.credentials) if credentials else None
    if claims is None:
        logger.info(f"Request to {request.url.path} is not authenticated - rejecting")
        raise InvalidCredentialsError("Token invalid or missing")

    try:
        user_id = resolve_user_id(claims)
    except MalformedTokenError:
        logger.warning("Authenticated token missing numeric 'sub' or name identifier claim")
        raise

    request.state.user_id = user_id
    return user_id


def get_current_user_id(request: Request) -> int:
    """Read the caller's id from request-scoped state.

    Raises:
        InvalidCredentialsError: If no identity was attached to this request
    """
    user_id = getattr(request.state, "user_id", None)
    if not isinstance(user_id, int) or isinstance(user_id, bool):
        raise InvalidCredentialsError("Authentication failed: missing or invalid user ID in token")
    return user_id
