"""Repository for User database operations."""

from typing import Optional

from eventplanner.database.models import UserDB
from eventplanner.database.repository import CrudRepository
from eventplanner.exceptions import EntityNotFoundError
from eventplanner.models.user import User


class UserRepository(CrudRepository[User]):
    """Repository for User database operations."""

    db_model = UserDB
    entity_name = "User"

    def _conflict_message(self, user: User) -> str:
        return f"User with email : {user.email} already exists"

    def exists_by_email(self, email: str) -> bool:
        return self.db.query(UserDB.id).filter(UserDB.email == email).first() is not None

    def find_by_email(self, email: str) -> Optional[User]:
        """Get user by email (exact match)."""
        user_db = self.db.query(UserDB).filter(UserDB.email == email).first()
        return user_db.to_pydantic() if user_db else None

    def find_by_email_or_throw(self, email: str) -> User:
        user = self.find_by_email(email)
        if user is None:
            raise EntityNotFoundError(f"User with email {email} not found")
        return user
