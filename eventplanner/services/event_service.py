"""Owner-scoped event lifecycle with conflict validation.

Note: the overlap check reads the owner's events and then writes without a
lock, so two concurrent creates in the same window can both pass and both
persist.
"""

import logging
from datetime import date
from typing import List, Optional

from eventplanner.database.event_repository import EventRepository
from eventplanner.engine.validator import check_overlap, validate_date_span, validate_shape
from eventplanner.exceptions import BadRequestError
from eventplanner.models.event import (
    Event,
    EventRequest,
    EventUpdateRequest,
    event_from_request,
    merge_event_request,
)

logger = logging.getLogger(__name__)


class EventService:
    """Create, read, update and delete events for their owner."""

    def __init__(self, events: EventRepository):
        self.events = events

    def find_by_date(self, user_id: int, on_date: Optional[date]) -> List[Event]:
        logger.info(f"Find events on date : {on_date} for the user : {user_id}")
        if on_date is None:
            raise BadRequestError("Insufficient parameters : date must be provided.")
        return self.events.find_all_by_user_id_and_date(user_id, on_date)

    def find_by_range(self, user_id: int, start: Optional[date], end: Optional[date]) -> List[Event]:
        logger.info(f"Find events between {start} and {end} for the user : {user_id}")
        if start is None or end is None:
            raise BadRequestError("Insufficient parameters : start date and end date must be provided.")
        if start > end:
            raise BadRequestError("Start date must not be after end date.")
        return self.events.find_all_by_user_id_and_range(user_id, start, end)

    def fetch(self, user_id: int, event_id: int) -> Event:
        logger.info(f"Find event with id : {event_id} and user with id : {user_id}")
        return self.events.find_by_user_id_and_id_or_throw(user_id, event_id)

    def create(self, user_id: int, request: EventRequest) -> Event:
        """Validate and store a new event owned by user_id.

        Raises:
            BadRequestError: If the event's shape is invalid
            ConflictError: If it overlaps another of the user's events
        """
        logger.info(f"Create new event for user {user_id} : {request.model_dump_json()}")
        event = event_from_request(user_id, request)
        self._ensure_valid(event)
        return self.events.create(event)

    def update(self, user_id: int, event_id: int, request: EventUpdateRequest) -> Event:
        """Merge the non-null fields of request into the stored event.

        The merged event is re-validated; its own stored state is ignored by
        the overlap check.
        """
        logger.info(
            f"Updating event with id : {event_id} for user {user_id} "
            f"and request : {request.model_dump_json(exclude_none=True)}"
        )
        existing = self.fetch(user_id, event_id)
        merged = merge_event_request(existing, request)
        self._ensure_valid(merged)
        return self.events.update(merged)

    def delete(self, user_id: int, event_id: int) -> None:
        logger.info(f"Delete event with id : {event_id} for user {user_id}")
        event = self.fetch(user_id, event_id)
        self.events.delete(event)

    def _ensure_valid(self, event: Event) -> None:
        validate_shape(event)
        validate_date_span(event)
        window = self.events.find_all_by_user_id_and_range(event.user_id, event.start_date, event.end_date)
        check_overlap(event, window)
