"""Repository for Event database operations."""

from datetime import date
from typing import List, Optional

from eventplanner.database.models import EventDB
from eventplanner.database.repository import CrudRepository
from eventplanner.exceptions import EntityNotFoundError
from eventplanner.models.event import Event


class EventRepository(CrudRepository[Event]):
    """Owner-scoped queries over events.

    All list queries are ordered by start date, then start time.
    """

    db_model = EventDB
    entity_name = "Event"

    def _query_by_user(self, user_id: int):
        return (
            self.db.query(EventDB)
            .filter(EventDB.user_id == user_id)
            .order_by(EventDB.start_date, EventDB.start_time, EventDB.id)
        )

    def find_all_by_user_id_and_date(self, user_id: int, on_date: date) -> List[Event]:
        """Events whose [start_date, end_date] span includes on_date."""
        rows = self._query_by_user(user_id).filter(
            EventDB.start_date <= on_date,
            EventDB.end_date >= on_date,
        ).all()
        return [row.to_pydantic() for row in rows]

    def find_all_by_user_id_and_range(self, user_id: int, start: date, end: date) -> List[Event]:
        """Events whose [start_date, end_date] span overlaps [start, end]."""
        rows = self._query_by_user(user_id).filter(
            EventDB.start_date <= end,
            EventDB.end_date >= start,
        ).all()
        return [row.to_pydantic() for row in rows]

    def find_by_user_id_and_id(self, user_id: int, event_id: int) -> Optional[Event]:
        row = self.db.query(EventDB).filter(
            EventDB.id == event_id,
            EventDB.user_id == user_id,
        ).first()
        return row.to_pydantic() if row else None

    def find_by_user_id_and_id_or_throw(self, user_id: int, event_id: int) -> Event:
        event = self.find_by_user_id_and_id(user_id, event_id)
        if event is None:
            raise EntityNotFoundError(f"Event with id {event_id} not found for user {user_id}")
        return event
