"""Service calendars of calendar.txt and calendar_dates.txt."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Mapping, Optional, Sequence

from ggtfs.fields import FieldType, string_is_nil_or_empty, validate_field
from ggtfs.notices import ForeignKeyViolationNotice, ValidationNotice
from ggtfs.parsing import (
    FILE_NAME_CALENDAR,
    FILE_NAME_CALENDAR_DATE,
    get_row_value_for_header_name,
)


@dataclass
class CalendarItem:
    """One row of calendar.txt; every field keeps its raw text."""

    service_id: Optional[str] = None
    monday: Optional[str] = None
    tuesday: Optional[str] = None
    wednesday: Optional[str] = None
    thursday: Optional[str] = None
    friday: Optional[str] = None
    saturday: Optional[str] = None
    sunday: Optional[str] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    line_number: int = 0


@dataclass
class CalendarDate:
    """One row of calendar_dates.txt; every field keeps its raw text."""

    service_id: Optional[str] = None
    date: Optional[str] = None
    exception_type: Optional[str] = None
    line_number: int = 0


_DAYS = ("monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday")
_CALENDAR_COLUMNS = ("service_id", *_DAYS, "start_date", "end_date")
_CALENDAR_DATE_COLUMNS = ("service_id", "date", "exception_type")


def _row_values(row, headers, columns):
    return {
        column: get_row_value_for_header_name(row, headers, column)
        for column in columns
        if column in headers
    }


def create_calendar_item(
    row: Optional[Sequence[str]], headers: Mapping[str, int], line_number: int
) -> CalendarItem:
    """Build a calendar item from a CSV row and its header index."""
    return CalendarItem(line_number=line_number, **_row_values(row, headers, _CALENDAR_COLUMNS))


def validate_calendar_item(item: CalendarItem) -> list[ValidationNotice]:
    """Check the fields of one calendar item."""
    fields = [(FieldType.ID, "service_id", item.service_id)]
    fields.extend((FieldType.CALENDAR_DAY, day, getattr(item, day)) for day in _DAYS)
    fields.append((FieldType.DATE, "start_date", item.start_date))
    fields.append((FieldType.DATE, "end_date", item.end_date))
    return [
        notice
        for field_type, name, value in fields
        for notice in validate_field(
            field_type, name, value, True, FILE_NAME_CALENDAR, item.line_number
        )
    ]


def validate_calendar_items(
    items: Optional[Iterable[Optional[CalendarItem]]],
) -> list[ValidationNotice]:
    """Check every calendar item, skipping missing entries."""
    return [
        notice
        for item in items or ()
        if item is not None
        for notice in validate_calendar_item(item)
    ]


def create_calendar_date(
    row: Optional[Sequence[str]], headers: Mapping[str, int], line_number: int
) -> CalendarDate:
    """Build a calendar date from a CSV row and its header index."""
    return CalendarDate(
        line_number=line_number, **_row_values(row, headers, _CALENDAR_DATE_COLUMNS)
    )


def validate_calendar_date(calendar_date: CalendarDate) -> list[ValidationNotice]:
    """Check the fields of one calendar date."""
    fields = (
        (FieldType.ID, "service_id", calendar_date.service_id),
        (FieldType.DATE, "date", calendar_date.date),
        (FieldType.CALENDAR_EXCEPTION, "exception_type", calendar_date.exception_type),
    )
    return [
        notice
        for field_type, name, value in fields
        for notice in validate_field(
            field_type, name, value, True, FILE_NAME_CALENDAR_DATE, calendar_date.line_number
        )
    ]


def validate_calendar_dates(
    calendar_dates: Optional[Iterable[Optional[CalendarDate]]],
    calendar_items: Optional[Iterable[Optional[CalendarItem]]],
) -> list[ValidationNotice]:
    """Check calendar dates; when calendar items are given, check service_id references."""
    dates = [date for date in calendar_dates or () if date is not None]
    results: list[ValidationNotice] = [
        notice for date in dates for notice in validate_calendar_date(date)
    ]
    if calendar_items is not None:
        results.extend(_reference_notices(dates, calendar_items))
    return results


def _reference_notices(dates, calendar_items):
    service_ids = {
        item.service_id
        for item in calendar_items
        if item is not None and not string_is_nil_or_empty(item.service_id)
    }
    for date in dates:
        if string_is_nil_or_empty(date.service_id) or date.service_id in service_ids:
            continue
        yield ForeignKeyViolationNotice(
            referencing_file_name=FILE_NAME_CALENDAR_DATE,
            referencing_field_name="service_id",
            referenced_field_name=FILE_NAME_CALENDAR,
            referenced_file_name="service_id",
            offending_value=date.service_id,
            referenced_at_row=date.line_number,
        )