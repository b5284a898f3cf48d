"""Event shape validation and same-window overlap detection.

Pure functions only; callers gather the candidate window from the repository.
Overlap uses half-open intervals: an event ending exactly when another starts
does not conflict.
"""

import logging
from datetime import date
from typing import Iterable, List

from eventplanner.exceptions import BadRequestError, ConflictError
from eventplanner.models.event import Event

logger = logging.getLogger(__name__)

MIN_EVENT_DATE = date(1900, 1, 1)


def validate_shape(event: Event) -> None:
    """Check an event's time span and earliest allowed date.

    Raises:
        BadRequestError: If end_time <= start_time or start_date is before 1900-01-01
    """
    if event.end_time <= event.start_time:
        raise BadRequestError("End Time must be greater than Start Time.")
    if event.start_date < MIN_EVENT_DATE:
        raise BadRequestError("Event Date cannot be earlier than year 1900.")


def validate_date_span(event: Event) -> None:
    """Check that the event does not end on a day before it starts.

    Raises:
        BadRequestError: If end_date < start_date
    """
    if event.end_date < event.start_date:
        raise BadRequestError("End Date cannot be earlier than Start Date.")


def overlaps(candidate: Event, other: Event) -> bool:
    """Return True if the two time-of-day spans overlap (half-open)."""
    return candidate.start_time < other.end_time and candidate.end_time > other.start_time


def find_conflicts(candidate: Event, same_window_events: Iterable[Event]) -> List[Event]:
    """Return the events in the window that overlap the candidate.

    Events sharing the candidate's id are skipped so an event never conflicts
    with its own stored state. A candidate without an id (not yet saved)
    matches no stored event.
    """
    return [
        other
        for other in same_window_events
        if other.id != candidate.id and overlaps(candidate, other)
    ]


def check_overlap(candidate: Event, same_window_events: Iterable[Event]) -> None:
    """Ensure the candidate overlaps no other event in its window.

    Raises:
        ConflictError: If any other event overlaps the candidate
    """
    conflicts = find_conflicts(candidate, same_window_events)
    if conflicts:
        logger.info(
            f"Event {candidate.id} for user {candidate.user_id} conflicts with "
            f"{[c.id for c in conflicts]}"
        )
        raise ConflictError("Event scheduling conflicts with an existing event")
