"""Owner-scoped event endpoints."""

import logging
from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends, Path, Query, Response, status

from eventplanner.api import urls
from eventplanner.api.dependencies import get_event_service
from eventplanner.auth.dependencies import get_current_user_id
from eventplanner.database.models import MAX_ID
from eventplanner.exceptions import BadRequestError
from eventplanner.models.event import Event, EventRequest, EventUpdateRequest
from eventplanner.services.event_service import EventService

logger = logging.getLogger(__name__)

router = APIRouter(prefix=urls.EVENTS, tags=["events"])


@router.get("", response_model=List[Event])
def list_events(
    on_date: Optional[date] = Query(None, alias="date"),
    start: Optional[date] = Query(None),
    end: Optional[date] = Query(None),
    user_id: int = Depends(get_current_user_id),
    service: EventService = Depends(get_event_service),
):
    """List the caller's events on a date, or overlapping a date range."""
    logger.info(f"GET {urls.EVENTS}?date={on_date}&start={start}&end={end}")
    if on_date is not None:
        return service.find_by_date(user_id, on_date)
    if start is not None or end is not None:
        return service.find_by_range(user_id, start, end)
    raise BadRequestError("Insufficient parameters : date or start date and end date must be provided.")


@router.get("/{event_id}", response_model=Event)
def get_event(
    event_id: int = Path(..., gt=0, le=MAX_ID),
    user_id: int = Depends(get_current_user_id),
    service: EventService = Depends(get_event_service),
):
    logger.info(f"GET {urls.EVENTS}/{event_id}")
    return service.fetch(user_id, event_id)


@router.post("", response_model=Event, status_code=status.HTTP_201_CREATED)
def create_event(
    body: EventRequest,
    response: Response,
    user_id: int = Depends(get_current_user_id),
    service: EventService = Depends(get_event_service),
):
    logger.info(f"POST {urls.EVENTS}")
    event = service.create(user_id, body)
    response.headers["Location"] = f"{urls.EVENTS}/{event.id}"
    return event


@router.put("/{event_id}", response_model=Event)
def update_event(
    body: EventUpdateRequest,
    event_id: int = Path(..., gt=0, le=MAX_ID),
    user_id: int = Depends(get_current_user_id),
    service: EventService = Depends(get_event_service),
):
    logger.info(f"PUT {urls.EVENTS}/{event_id}")
    return service.update(user_id, event_id, body)


@router.delete("/{event_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_event(
    event_id: int = Path(..., gt=0, le=MAX_ID),
    user_id: int = Depends(get_current_user_id),
    service: EventService = Depends(get_event_service),
):
    logger.info(f"DELETE {urls.EVENTS}/{event_id}")
    service.delete(user_id, event_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
