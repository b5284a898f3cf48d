"""Self-service user CRUD."""

import logging
from typing import List

from eventplanner.auth.passwords import hash_password
from eventplanner.database.user_repository import UserRepository
from eventplanner.exceptions import ConflictError
from eventplanner.models.user import User, UserRequest, UserUpdateRequest, merge_user_request

logger = logging.getLogger(__name__)


class UserService:
    def __init__(self, users: UserRepository):
        self.users = users

    def list_all(self) -> List[User]:
        logger.info("Find all users")
        return self.users.find_all()

    def fetch(self, user_id: int) -> User:
        logger.info(f"Find user with id : {user_id}")
        return self.users.find_or_throw(user_id)

    def create(self, request: UserRequest) -> User:
        logger.info(f"Create new user with email : {request.email}")
        user = User(
            name=request.name,
            email=request.email,
            password_hash=hash_password(request.password),
        )
        return self.users.create(user)

    def update(self, user_id: int, request: UserUpdateRequest) -> User:
        """Apply a partial update; a supplied password is re-hashed."""
        logger.info(f"Updating user with id : {user_id}")
        existing = self.fetch(user_id)
        if (
            request.email is not None
            and request.email != existing.email
            and self.users.exists_by_email(request.email)
        ):
            raise ConflictError(f"User with email : {request.email} already exists")

        password_hash = hash_password(request.password) if request.password else None
        merged = merge_user_request(existing, request, password_hash=password_hash)
        return self.users.update(merged)

    def delete(self, user_id: int) -> None:
        """Delete the user; their events cascade at the database."""
        logger.info(f"Delete user with id : {user_id}")
        user = self.fetch(user_id)
        self.users.delete(user)
