"""Trips of trips.txt."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Mapping, Optional, Sequence

from ggtfs.calendar import CalendarItem
from ggtfs.fields import FieldType, string_is_nil_or_empty, validate_field
from ggtfs.notices import ForeignKeyViolationNotice, ValidationNotice
from ggtfs.parsing import (
    FILE_NAME_CALENDAR,
    FILE_NAME_ROUTES,
    FILE_NAME_SHAPES,
    FILE_NAME_TRIPS,
    get_row_value_for_header_name,
)
from ggtfs.route import Route
from ggtfs.shape import Shape


@dataclass
class Trip:
    """One row of trips.txt; every field keeps its raw text."""

    route_id: Optional[str] = None  # route_id (required)
    service_id: Optional[str] = None  # service_id (required)
    id: Optional[str] = None  # trip_id (required)
    head_sign: Optional[str] = None  # trip_headsign (optional)
    short_name: Optional[str] = None  # trip_short_name (optional)
    direction_id: Optional[str] = None  # direction_id (optional)
    block_id: Optional[str] = None  # block_id (optional)
    shape_id: Optional[str] = None  # shape_id (conditionally required)
    wheelchair_accessible: Optional[str] = None  # wheelchair_accessible (optional)
    bikes_allowed: Optional[str] = None  # bikes_allowed (optional)
    line_number: int = 0


_COLUMNS = {
    "trip_id": "id",
    "route_id": "route_id",
    "service_id": "service_id",
    "trip_headsign": "head_sign",
    "trip_short_name": "short_name",
    "direction_id": "direction_id",
    "block_id": "block_id",
    "shape_id": "shape_id",
    "wheelchair_accessible": "wheelchair_accessible",
    "bikes_allowed": "bikes_allowed",
}


def create_trip(
    row: Optional[Sequence[str]], headers: Mapping[str, int], line_number: int
) -> Trip:
    """Build a trip from a CSV row and its header index."""
    values = {
        attribute: get_row_value_for_header_name(row, headers, header)
        for header, attribute in _COLUMNS.items()
        if header in headers
    }
    return Trip(line_number=line_number, **values)


def validate_trip(trip: Trip) -> list[ValidationNotice]:
    """Check the fields of one trip."""
    fields = (
        (FieldType.ID, "trip_id", trip.id, True),
        (FieldType.ID, "route_id", trip.route_id, True),
        (FieldType.ID, "service_id", trip.service_id, True),
        (FieldType.TEXT, "trip_headsign", trip.head_sign, False),
        (FieldType.TEXT, "trip_short_name", trip.short_name, False),
        (FieldType.DIRECTION_ID, "direction_id", trip.direction_id, False),
        (FieldType.ID, "block_id", trip.block_id, False),
        (FieldType.ID, "shape_id", trip.shape_id, False),
        (FieldType.WHEELCHAIR_ACCESSIBLE, "wheelchair_accessible", trip.wheelchair_accessible, False),
        (FieldType.BIKES_ALLOWED, "bikes_allowed", trip.bikes_allowed, False),
    )
    return [
        notice
        for field_type, name, value, required in fields
        for notice in validate_field(
            field_type, name, value, required, FILE_NAME_TRIPS, trip.line_number
        )
    ]


def _key_set(entities, attribute):
    if entities is None:
        return None
    return {getattr(entity, attribute) for entity in entities if entity is not None}


def _violation(trip: Trip, field_name: str, file_name: str, value) -> ForeignKeyViolationNotice:
    return ForeignKeyViolationNotice(
        referencing_file_name=FILE_NAME_TRIPS,
        referencing_field_name=field_name,
        referenced_file_name=file_name,
        referenced_field_name=field_name,
        offending_value=value,
        referenced_at_row=trip.line_number,
    )


def validate_trips(
    trips: Optional[Iterable[Optional[Trip]]],
    routes: Optional[Iterable[Optional[Route]]],
    calendar_items: Optional[Iterable[Optional[CalendarItem]]],
    shapes: Optional[Iterable[Optional[Shape]]],
) -> list[ValidationNotice]:
    """Check every trip and, for each collection given, its references into it."""
    route_ids = _key_set(routes, "id")
    service_ids = _key_set(calendar_items, "service_id")
    shape_ids = _key_set(shapes, "id")

    results: list[ValidationNotice] = []
    for trip in trips or ():
        if trip is None:
            continue

        results.extend(validate_trip(trip))

        if route_ids is not None and trip.route_id not in route_ids:
            results.append(_violation(trip, "route_id", FILE_NAME_ROUTES, trip.route_id))

        if service_ids is not None and trip.service_id not in service_ids:
            results.append(_violation(trip, "service_id", FILE_NAME_CALENDAR, trip.service_id))

        if (
            shape_ids is not None
            and not string_is_nil_or_empty(trip.shape_id)
            and trip.shape_id not in shape_ids
        ):
            results.append(_violation(trip, "shape_id", FILE_NAME_SHAPES, trip.shape_id))

    return results