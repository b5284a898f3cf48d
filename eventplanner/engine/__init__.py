"""Scheduling rules for eventplanner."""

from eventplanner.engine.validator import (
    MIN_EVENT_DATE,
    check_overlap,
    find_conflicts,
    overlaps,
    validate_date_span,
    validate_shape,
)

__all__ = [
    "MIN_EVENT_DATE",
    "check_overlap",
    "find_conflicts",
    "overlaps",
    "validate_date_span",
    "validate_shape",
]
