"""Tests for event shape validation and overlap detection."""

from datetime import date, time

import pytest

from eventplanner.engine.validator import (
    MIN_EVENT_DATE,
    check_overlap,
    find_conflicts,
    validate_date_span,
    validate_shape,
)
from eventplanner.exceptions import BadRequestError, ConflictError
from eventplanner.models.event import Event


def _event(event_id=None, start=time(9, 0), end=time(10, 0), **overrides) -> Event:
    base = {
        "id": event_id,
        "user_id": 1,
        "title": "Event",
        "start_date": date(2023, 10, 15),
        "end_date": date(2023, 10, 15),
        "start_time": start,
        "end_time": end,
    }
    base.update(overrides)
    return Event(**base)


class TestValidateShape:
    """validate_shape fails iff end <= start or start_date < 1900-01-01."""

    def test_valid_event_passes(self):
        validate_shape(_event())

    @pytest.mark.parametrize("start,end", [
        (time(10, 0), time(10, 0)),
        (time(10, 0), time(9, 59)),
        (time(23, 0), time(0, 30)),
    ])
    def test_end_not_after_start_fails(self, start, end):
        with pytest.raises(BadRequestError) as exc_info:
            validate_shape(_event(start=start, end=end))
        assert exc_info.value.message == "End Time must be greater than Start Time."
        assert exc_info.value.status_code == 400

    def test_date_before_1900_fails(self):
        with pytest.raises(BadRequestError) as exc_info:
            validate_shape(_event(start_date=date(1899, 12, 31), end_date=date(1899, 12, 31)))
        assert exc_info.value.message == "Event Date cannot be earlier than year 1900."

    def test_first_day_of_1900_is_allowed(self):
        validate_shape(_event(start_date=MIN_EVENT_DATE, end_date=MIN_EVENT_DATE))

    def test_time_check_runs_before_date_check(self):
        with pytest.raises(BadRequestError) as exc_info:
            validate_shape(_event(start=time(11, 0), end=time(10, 0), start_date=date(1800, 1, 1)))
        assert "End Time" in exc_info.value.message

    def test_date_span_is_not_part_of_shape(self):
        # end_date ordering is checked separately
        validate_shape(_event(start_date=date(2023, 10, 16), end_date=date(2023, 10, 15)))


def test_validate_date_span_rejects_end_before_start():
    with pytest.raises(BadRequestError) as exc_info:
        validate_date_span(_event(start_date=date(2023, 10, 16), end_date=date(2023, 10, 15)))
    assert exc_info.value.message == "End Date cannot be earlier than Start Date."


def test_validate_date_span_accepts_multi_day_event():
    validate_date_span(_event(start_date=date(2023, 10, 15), end_date=date(2023, 10, 17)))


class TestCheckOverlap:
    """Half-open overlap between a candidate and its same-window events."""

    @pytest.mark.parametrize("other_start,other_end", [
        (time(9, 30), time(10, 30)),   # overlaps the end
        (time(8, 30), time(9, 30)),    # overlaps the start
        (time(9, 15), time(9, 45)),    # contained
        (time(8, 0), time(11, 0)),     # contains
        (time(9, 0), time(10, 0)),     # identical span
    ])
    def test_overlapping_spans_conflict(self, other_start, other_end):
        candidate = _event(event_id=None)
        other = _event(event_id=2, start=other_start, end=other_end)

        with pytest.raises(ConflictError) as exc_info:
            check_overlap(candidate, [other])
        assert exc_info.value.message == "Event scheduling conflicts with an existing event"
        assert exc_info.value.status_code == 409

    @pytest.mark.parametrize("other_start,other_end", [
        (time(10, 0), time(11, 0)),    # starts when candidate ends
        (time(8, 0), time(9, 0)),      # ends when candidate starts
        (time(12, 0), time(13, 0)),
    ])
    def test_touching_or_disjoint_spans_do_not_conflict(self, other_start, other_end):
        candidate = _event(event_id=None)
        other = _event(event_id=2, start=other_start, end=other_end)

        check_overlap(candidate, [other])

    def test_event_never_conflicts_with_itself(self):
        stored = _event(event_id=1, start=time(9, 0), end=time(10, 0))
        updated = _event(event_id=1, start=time(9, 30), end=time(10, 30))

        check_overlap(updated, [stored])

    def test_self_exclusion_still_checks_other_events(self):
        stored_self = _event(event_id=1)
        neighbour = _event(event_id=2, start=time(10, 0), end=time(11, 0))
        updated = _event(event_id=1, start=time(9, 30), end=time(10, 30))

        with pytest.raises(ConflictError):
            check_overlap(updated, [stored_self, neighbour])

    def test_empty_window(self):
        check_overlap(_event(), [])

    def test_validator_does_not_filter_by_date(self):
        # The caller picks the window; events on other dates still count.
        other = _event(event_id=2, start_date=date(2023, 10, 20), end_date=date(2023, 10, 20))
        with pytest.raises(ConflictError):
            check_overlap(_event(), [other])


def test_find_conflicts_returns_only_overlapping_events():
    candidate = _event(event_id=10, start=time(9, 0), end=time(12, 0))
    a = _event(event_id=1, start=time(8, 0), end=time(9, 0))
    b = _event(event_id=2, start=time(11, 0), end=time(13, 0))
    c = _event(event_id=3, start=time(9, 30), end=time(10, 0))

    conflicts = find_conflicts(candidate, [a, b, c])

    assert [e.id for e in conflicts] == [2, 3]
