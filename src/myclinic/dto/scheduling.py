"""Scheduling and time-off request schemas."""

from datetime import date
from typing import Optional

from myclinic.constants import (
    DEFAULT_PAGE,
    DEFAULT_PAGE_SIZE,
    DEFAULT_SORT_FIELD,
    MAX_PAGE_SIZE,
    TEXT_MAX_LENGTH,
)
from myclinic.dto.base import RequestModel
from myclinic.dto.enums import ReviewAction, SortOrder, TimeOffStatus, TimeOffType
from myclinic.validation import FieldRule, Schema, default_registry


class QuerySchedulesRequest(RequestModel):
    user_id: Optional[str] = None
    branch_id: Optional[str] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None


class CreateTimeOffRequest(RequestModel):
    """A staff member's time-off request.

    Attributes:
        type: Kind of leave
        start_date: First day off
        end_date: Last day off
        reason: Optional explanation, at most 500 characters
    """

    type: TimeOffType
    start_date: date
    end_date: date
    reason: Optional[str] = None


class ReviewTimeOffRequest(RequestModel):
    action: ReviewAction
    notes: Optional[str] = None


class QueryTimeOffRequest(RequestModel):
    """Filters and paging for the time-off listing.

    start_date and end_date stay plain strings here; the listing accepts
    partial dates as filters.
    """

    user_id: Optional[str] = None
    type: Optional[TimeOffType] = None
    status: Optional[TimeOffStatus] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_PAGE_SIZE
    sort_by: str = DEFAULT_SORT_FIELD
    sort_order: SortOrder = SortOrder.DESC


QUERY_SCHEDULES = default_registry.register(
    Schema(
        name="QuerySchedules",
        model=QuerySchedulesRequest,
        rules=(
            FieldRule.string("userId", description="Filter by user ID"),
            FieldRule.string("branchId", description="Filter by branch ID"),
            FieldRule.date("startDate", description="Start date (YYYY-MM-DD)"),
            FieldRule.date("endDate", description="End date (YYYY-MM-DD)"),
        ),
    )
)

CREATE_TIME_OFF = default_registry.register(
    Schema(
        name="CreateTimeOff",
        model=CreateTimeOffRequest,
        rules=(
            FieldRule.enum(
                "type", TimeOffType, required=True, description="Type of time off"
            ),
            FieldRule.date(
                "startDate", required=True, description="Start date (YYYY-MM-DD)"
            ),
            FieldRule.date(
                "endDate", required=True, description="End date (YYYY-MM-DD)"
            ),
            FieldRule.string(
                "reason",
                max_length=TEXT_MAX_LENGTH,
                description="Reason for time off",
            ),
        ),
    )
)

REVIEW_TIME_OFF = default_registry.register(
    Schema(
        name="ReviewTimeOff",
        model=ReviewTimeOffRequest,
        rules=(
            FieldRule.enum(
                "action", ReviewAction, required=True, description="Review action"
            ),
            FieldRule.string(
                "notes", max_length=TEXT_MAX_LENGTH, description="Review notes"
            ),
        ),
    )
)

QUERY_TIME_OFF = default_registry.register(
    Schema(
        name="QueryTimeOff",
        model=QueryTimeOffRequest,
        rules=(
            FieldRule.string("userId", description="Filter by user ID"),
            FieldRule.enum("type", TimeOffType, description="Filter by type"),
            FieldRule.enum("status", TimeOffStatus, description="Filter by status"),
            FieldRule.string(
                "startDate", description="Start date filter (YYYY-MM-DD)"
            ),
            FieldRule.string("endDate", description="End date filter (YYYY-MM-DD)"),
            FieldRule.integer(
                "page", minimum=1, default=DEFAULT_PAGE, description="Page number"
            ),
            FieldRule.integer(
                "limit",
                minimum=1,
                maximum=MAX_PAGE_SIZE,
                default=DEFAULT_PAGE_SIZE,
                description="Items per page",
            ),
            FieldRule.string(
                "sortBy", default=DEFAULT_SORT_FIELD, description="Sort by field"
            ),
            FieldRule.enum(
                "sortOrder",
                SortOrder,
                default=SortOrder.DESC.value,
                description="Sort order",
            ),
        ),
    )
)
