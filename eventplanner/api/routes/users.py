"""Self-scoped user endpoints."""

import logging

from fastapi import APIRouter, Depends, Response, status

from eventplanner.api import urls
from eventplanner.api.auth_models import UserResponse
from eventplanner.api.dependencies import get_user_service
from eventplanner.auth.dependencies import get_current_user_id
from eventplanner.models.user import UserUpdateRequest
from eventplanner.services.user_service import UserService

logger = logging.getLogger(__name__)

router = APIRouter(prefix=urls.USERS, tags=["users"])


@router.get("/me", response_model=UserResponse)
def get_me(user_id: int = Depends(get_current_user_id), service: UserService = Depends(get_user_service)):
    logger.info(f"GET {urls.USERS}/me")
    return UserResponse.from_user(service.fetch(user_id))


@router.put("", response_model=UserResponse)
def update_me(
    body: UserUpdateRequest,
    user_id: int = Depends(get_current_user_id),
    service: UserService = Depends(get_user_service),
):
    logger.info(f"PUT {urls.USERS}")
    return UserResponse.from_user(service.update(user_id, body))


@router.delete("", status_code=status.HTTP_204_NO_CONTENT)
def delete_me(user_id: int = Depends(get_current_user_id), service: UserService = Depends(get_user_service)):
    logger.info(f"DELETE {urls.USERS}")
    service.delete(user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
