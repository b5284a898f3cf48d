"""Per-request wiring of repositories and services."""

from fastapi import Depends
from sqlalchemy.orm import Session

from eventplanner.auth.dependencies import get_token_issuer
from eventplanner.auth.jwt import TokenIssuer
from eventplanner.database.database import get_db
from eventplanner.database.event_repository import EventRepository
from eventplanner.database.user_repository import UserRepository
from eventplanner.services.auth_service import AuthService
from eventplanner.services.event_service import EventService
from eventplanner.services.user_service import UserService


def get_user_repository(db: Session = Depends(get_db)) -> UserRepository:
    return UserRepository(db)


def get_event_repository(db: Session = Depends(get_db)) -> EventRepository:
    return EventRepository(db)


def get_auth_service(
    users: UserRepository = Depends(get_user_repository),
    token_issuer: TokenIssuer = Depends(get_token_issuer),
) -> AuthService:
    return AuthService(users, token_issuer)


def get_event_service(events: EventRepository = Depends(get_event_repository)) -> EventService:
    return EventService(events)


def get_user_service(users: UserRepository = Depends(get_user_repository)) -> UserService:
    return UserService(users)
