"""Tests for event lifecycle and conflict detection."""

from datetime import date, time

import pytest

from eventplanner.exceptions import BadRequestError, ConflictError, EntityNotFoundError
from eventplanner.models.event import DEFAULT_TIMEZONE, EventRequest, EventType, EventUpdateRequest

DAY = date(2023, 10, 15)


def _request(start, end, day=DAY, end_date=None, title="Event", **kwargs) -> EventRequest:
    return EventRequest(
        title=title,
        start_date=day,
        end_date=end_date,
        start_time=start,
        end_time=end,
        **kwargs,
    )


class TestCreate:
    def test_create_applies_defaults(self, event_service, test_user):
        event = event_service.create(test_user.id, _request(time(9), time(10)))

        assert event.id is not None
        assert event.user_id == test_user.id
        assert event.end_date == DAY
        assert event.timezone == DEFAULT_TIMEZONE
        assert event.event_type == EventType.OTHER.value

    def test_create_keeps_supplied_fields(self, event_service, test_user):
        event = event_service.create(
            test_user.id,
            _request(time(9), time(10), description="Planning", timezone="Europe/Paris", event_type="personal"),
        )

        assert event.description == "Planning"
        assert event.timezone == "Europe/Paris"
        assert event.event_type == "Personal"

    def test_overlap_touch_and_self_exclusion(self, event_service, test_user):
        """A 09-10 stored; B 09:30-10:30 conflicts; C 10-11 only touches A."""
        a = event_service.create(test_user.id, _request(time(9), time(10), title="A"))

        with pytest.raises(ConflictError) as exc_info:
            event_service.create(test_user.id, _request(time(9, 30), time(10, 30), title="B"))
        assert exc_info.value.message == "Event scheduling conflicts with an existing event"

        c = event_service.create(test_user.id, _request(time(10), time(11), title="C"))
        assert c.id != a.id

        # A moves to end exactly when C starts; it must not collide with itself
        updated = event_service.update(
            test_user.id, a.id, EventUpdateRequest(start_time=time(8, 30), end_time=time(10))
        )
        assert updated.start_time == time(8, 30)
        assert updated.end_time == time(10)

    def test_moving_onto_another_event_conflicts(self, event_service, test_user):
        a = event_service.create(test_user.id, _request(time(9), time(10), title="A"))
        event_service.create(test_user.id, _request(time(10), time(11), title="C"))

        with pytest.raises(ConflictError):
            event_service.update(
                test_user.id, a.id, EventUpdateRequest(start_time=time(10), end_time=time(11))
            )

        assert event_service.fetch(test_user.id, a.id).start_time == time(9)

    def test_different_day_same_time_is_fine(self, event_service, test_user):
        event_service.create(test_user.id, _request(time(9), time(10)))
        event_service.create(test_user.id, _request(time(9), time(10), day=date(2023, 10, 16)))

    def test_multi_day_event_conflicts_inside_its_span(self, event_service, test_user):
        event_service.create(
            test_user.id, _request(time(9), time(17), day=date(2023, 10, 14), end_date=date(2023, 10, 16))
        )

        with pytest.raises(ConflictError):
            event_service.create(test_user.id, _request(time(12), time(13)))

    def test_other_users_events_never_conflict(self, event_service, test_user, other_user):
        event_service.create(other_user.id, _request(time(9), time(10)))
        event = event_service.create(test_user.id, _request(time(9), time(10)))
        assert event.user_id == test_user.id

    @pytest.mark.parametrize("start,end", [(time(10), time(10)), (time(11), time(10))])
    def test_end_time_must_follow_start_time(self, event_service, test_user, start, end):
        with pytest.raises(BadRequestError) as exc_info:
            event_service.create(test_user.id, _request(start, end))
        assert exc_info.value.message == "End Time must be greater than Start Time."

    def test_dates_before_1900_are_rejected(self, event_service, test_user):
        with pytest.raises(BadRequestError) as exc_info:
            event_service.create(test_user.id, _request(time(9), time(10), day=date(1899, 12, 31)))
        assert exc_info.value.message == "Event Date cannot be earlier than year 1900."

    def test_end_date_before_start_date_is_rejected(self, event_service, test_user):
        with pytest.raises(BadRequestError) as exc_info:
            event_service.create(test_user.id, _request(time(9), time(10), end_date=date(2023, 10, 14)))
        assert exc_info.value.message == "End Date cannot be earlier than Start Date."

    def test_rejected_create_persists_nothing(self, event_service, event_repository, test_user):
        with pytest.raises(BadRequestError):
            event_service.create(test_user.id, _request(time(11), time(10)))
        assert event_repository.find_all() == []


class TestQueries:
    @pytest.fixture
    def stored(self, event_service, test_user):
        return [
            event_service.create(test_user.id, _request(time(14), time(15), title="afternoon")),
            event_service.create(test_user.id, _request(time(9), time(10), title="morning")),
            event_service.create(
                test_user.id, _request(time(9), time(10), day=date(2023, 10, 20), title="later")
            ),
        ]

    def test_find_by_date_is_ordered_by_start_time(self, event_service, test_user, stored):
        events = event_service.find_by_date(test_user.id, DAY)
        assert [e.title for e in events] == ["morning", "afternoon"]

    def test_find_by_date_requires_a_date(self, event_service, test_user):
        with pytest.raises(BadRequestError) as exc_info:
            event_service.find_by_date(test_user.id, None)
        assert exc_info.value.message == "Insufficient parameters : date must be provided."

    def test_find_by_range_includes_both_days(self, event_service, test_user, stored):
        events = event_service.find_by_range(test_user.id, DAY, date(2023, 10, 20))
        assert [e.title for e in events] == ["morning", "afternoon", "later"]

    def test_find_by_range_excludes_outside(self, event_service, test_user, stored):
        assert event_service.find_by_range(test_user.id, date(2023, 10, 16), date(2023, 10, 19)) == []

    @pytest.mark.parametrize("start,end", [(None, DAY), (DAY, None), (None, None)])
    def test_find_by_range_requires_both_ends(self, event_service, test_user, start, end):
        with pytest.raises(BadRequestError) as exc_info:
            event_service.find_by_range(test_user.id, start, end)
        assert exc_info.value.message == (
            "Insufficient parameters : start date and end date must be provided."
        )

    def test_find_by_range_rejects_inverted_range(self, event_service, test_user):
        with pytest.raises(BadRequestError) as exc_info:
            event_service.find_by_range(test_user.id, date(2023, 10, 20), DAY)
        assert exc_info.value.message == "Start date must not be after end date."

    def test_queries_are_owner_scoped(self, event_service, other_user, stored):
        assert event_service.find_by_date(other_user.id, DAY) == []


class TestFetchUpdateDelete:
    def test_fetch_other_users_event_is_not_found(self, event_service, test_user, other_user):
        event = event_service.create(test_user.id, _request(time(9), time(10)))

        with pytest.raises(EntityNotFoundError) as exc_info:
            event_service.fetch(other_user.id, event.id)
        assert exc_info.value.message == f"Event with id {event.id} not found for user {other_user.id}"

    def test_update_only_touches_supplied_fields(self, event_service, test_user):
        event = event_service.create(
            test_user.id, _request(time(9), time(10), description="keep me", event_type="Work")
        )

        updated = event_service.update(test_user.id, event.id, EventUpdateRequest(title="Renamed"))

        assert updated.title == "Renamed"
        assert updated.description == "keep me"
        assert updated.event_type == "Work"
        assert updated.start_time == time(9)
        assert updated.id == event.id
        assert updated.user_id == test_user.id

    def test_update_is_revalidated(self, event_service, test_user):
        event = event_service.create(test_user.id, _request(time(9), time(10)))

        with pytest.raises(BadRequestError):
            event_service.update(test_user.id, event.id, EventUpdateRequest(end_time=time(8)))

    def test_update_of_missing_event_is_not_found(self, event_service, test_user):
        with pytest.raises(EntityNotFoundError):
            event_service.update(test_user.id, 999, EventUpdateRequest(title="x"))

    def test_delete_removes_event(self, event_service, test_user):
        event = event_service.create(test_user.id, _request(time(9), time(10)))

        event_service.delete(test_user.id, event.id)

        with pytest.raises(EntityNotFoundError):
            event_service.fetch(test_user.id, event.id)

    def test_delete_other_users_event_is_not_found(self, event_service, test_user, other_user):
        event = event_service.create(test_user.id, _request(time(9), time(10)))

        with pytest.raises(EntityNotFoundError):
            event_service.delete(other_user.id, event.id)
        assert event_service.fetch(test_user.id, event.id).id == event.id
