"""Registration and password login."""

import logging

from eventplanner.auth.jwt import TokenIssuer
from eventplanner.auth.passwords import hash_password, verify_password
from eventplanner.database.user_repository import UserRepository
from eventplanner.exceptions import ConflictError, InvalidCredentialsError
from eventplanner.models.auth import AuthResponse, LoginRequest
from eventplanner.models.user import User, UserRequest

logger = logging.getLogger(__name__)


class AuthService:
    """Orchestrates registration (unique email, hash, persist) and login."""

    def __init__(self, users: UserRepository, token_issuer: TokenIssuer):
        self.users = users
        self.token_issuer = token_issuer

    def register(self, request: UserRequest) -> User:
        """Create a user account.

        The returned user still carries password_hash; callers must not
        expose it.

        Raises:
            ConflictError: If the email is already registered
        """
        logger.info(f"Register new user with email : {request.email}")
        if self.users.exists_by_email(request.email):
            raise ConflictError(f"User with email : {request.email} already exists")

        user = User(
            name=request.name,
            email=request.email,
            password_hash=hash_password(request.password),
        )
        return self.users.create(user)

    def login(self, request: LoginRequest) -> AuthResponse:
        """Verify credentials and issue an access token.

        Raises:
            EntityNotFoundError: If no user has this email
            InvalidCredentialsError: If the password is missing, empty or wrong
        """
        logger.info(f"Login attempt for email : {request.email}")
        user = self.users.find_by_email_or_throw(request.email)

        if not request.password or not verify_password(request.password, user.password_hash):
            logger.info(f"Invalid credentials for user {user.id}")
            raise InvalidCredentialsError("Invalid credentials")

        return self.token_issuer.issue(user)
