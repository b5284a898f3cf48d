"""Public registration and login endpoints."""

import logging

from fastapi import APIRouter, Depends, Response, status

from eventplanner.api import urls
from eventplanner.api.auth_models import UserResponse
from eventplanner.api.dependencies import get_auth_service
from eventplanner.auth.dependencies import allow_anonymous
from eventplanner.models.auth import AuthResponse, LoginRequest
from eventplanner.models.user import UserRequest
from eventplanner.services.auth_service import AuthService

logger = logging.getLogger(__name__)

router = APIRouter(prefix=urls.AUTH, tags=["auth"])


@router.post("/register", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
@allow_anonymous
def register(body: UserRequest, response: Response, service: AuthService = Depends(get_auth_service)):
    """Register a new user account."""
    logger.info(f"POST {urls.AUTH}/register")
    user = service.register(body)
    response.headers["Location"] = f"{urls.AUTH}/register"
    return UserResponse.from_user(user)


@router.post("/login", response_model=AuthResponse)
@allow_anonymous
def login(body: LoginRequest, service: AuthService = Depends(get_auth_service)):
    """Exchange email and password for a bearer token."""
    logger.info(f"POST {urls.AUTH}/login")
    return service.login(body)
