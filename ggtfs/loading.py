"""Loading GTFS entities from CSV text."""

from __future__ import annotations

import csv
from typing import Callable, Iterable, Mapping, Optional, Sequence, TypeVar

from ggtfs.agency import Agency, create_agency
from ggtfs.calendar import CalendarDate, CalendarItem, create_calendar_date, create_calendar_item
from ggtfs.parsing import get_header_index
from ggtfs.route import Route, create_route
from ggtfs.shape import Shape, create_shape
from ggtfs.stop import Stop, create_stop
from ggtfs.stoptime import StopTime, create_stop_time
from ggtfs.trip import Trip, create_trip

T = TypeVar("T")

_AGENCY_HEADERS = (
    "agency_id", "agency_name", "agency_url", "agency_timezone",
    "agency_lang", "agency_phone", "agency_fare_url", "agency_email",
)
_SHAPE_HEADERS = (
    "shape_id", "shape_pt_lat", "shape_pt_lon", "shape_pt_sequence", "shape_dist_traveled",
)
_STOP_HEADERS = (
    "stop_id", "stop_code", "stop_name", "stop_desc", "stop_lat", "stop_lon", "zone_id",
    "stop_url", "location_type", "parent_station", "stop_timezone", "wheelchair_boarding",
    "level_id", "platform_code", "municipality_id",
)
_CALENDAR_HEADERS = (
    "service_id", "monday", "tuesday", "wednesday", "thursday", "friday", "saturday",
    "sunday", "start_date", "end_date",
)
_CALENDAR_DATE_HEADERS = ("service_id", "date", "exception_type")
_ROUTE_HEADERS = (
    "route_id", "agency_id", "route_short_name", "route_long_name", "route_desc",
    "route_type", "route_url", "route_color", "route_text_color", "route_sort_order",
    "continuous_pickup", "continuous_drop_off", "network_id",
)
_STOP_TIME_HEADERS = (
    "trip_id", "arrival_time", "departure_time", "stop_id", "stop_sequence",
    "stop_headsign", "pickup_type", "drop_off_type", "continuous_pickup",
    "continuous_drop_off", "shape_dist_traveled", "timepoint",
)
_TRIP_HEADERS = (
    "route_id", "service_id", "trip_id", "trip_headsign", "trip_short_name",
    "direction_id", "block_id", "shape_id", "wheelchair_accessible", "bikes_allowed",
)


class _FieldCountError(csv.Error):
    """A record whose field count differs from the first record's."""

    def __init__(self, message: str, row: list[str]):
        super().__init__(message)
        self.row = row


class GtfsCsvReader:
    """Iterates over the non-blank CSV records of one GTFS file.

    Every record must have as many fields as the first one; a record that
    does not raises ``csv.Error`` carrying the record as ``row``.
    """

    def __init__(
        self,
        source: Iterable[str],
        fail_on_header_errors: bool = True,
        skip_rows_with_errors: bool = True,
    ):
        self._rows = csv.reader(source, strict=True)
        self._field_count: Optional[int] = None
        self.fail_on_header_errors = fail_on_header_errors
        self.skip_rows_with_errors = skip_rows_with_errors

    def __iter__(self) -> "GtfsCsvReader":
        return self

    def __next__(self) -> list[str]:
        while True:
            try:
                row = next(self._rows)
            except csv.Error as err:
                raise csv.Error(f"record on line {self._rows.line_num}: {err}") from err
            if row:
                break

        if self._field_count is None:
            self._field_count = len(row)
        elif len(row) != self._field_count:
            raise _FieldCountError(
                f"record on line {self._rows.line_num}: wrong number of fields", row
            )
        return row


def _load(
    header_names: Sequence[str],
    reader: GtfsCsvReader,
    create: Callable[[Optional[Sequence[str]], Mapping[str, int], int], T],
) -> tuple[list[T], list[Exception]]:
    headers, header_errors = get_header_index(reader, header_names)
    errors: list[Exception] = [ValueError(f"line 1: {err}") for err in header_errors]

    if header_errors and reader.fail_on_header_errors:
        return [], errors
    if not headers:
        return [], errors

    entities: list[T] = []
    line_number = 2
    while True:
        try:
            row: Optional[list[str]] = next(reader)
        except StopIteration:
            break
        except csv.Error as err:
            errors.append(ValueError(f"line {line_number}: {err}"))
            if reader.skip_rows_with_errors:
                line_number += 1
                continue
            row = getattr(err, "row", None)

        entities.append(create(row, headers, line_number))
        line_number += 1

    return entities, errors


def load_agencies(reader: GtfsCsvReader) -> tuple[list[Agency], list[Exception]]:
    """Load agencies from agency.txt content."""
    return _load(_AGENCY_HEADERS, reader, create_agency)


def load_routes(reader: GtfsCsvReader) -> tuple[list[Route], list[Exception]]:
    """Load routes from routes.txt content."""
    return _load(_ROUTE_HEADERS, reader, create_route)


def load_stops(reader: GtfsCsvReader) -> tuple[list[Stop], list[Exception]]:
    """Load stops from stops.txt content."""
    return _load(_STOP_HEADERS, reader, create_stop)


def load_trips(reader: GtfsCsvReader) -> tuple[list[Trip], list[Exception]]:
    """Load trips from trips.txt content."""
    return _load(_TRIP_HEADERS, reader, create_trip)


def load_stop_times(reader: GtfsCsvReader) -> tuple[list[StopTime], list[Exception]]:
    """Load stop times from stop_times.txt content."""
    return _load(_STOP_TIME_HEADERS, reader, create_stop_time)


def load_calendar(reader: GtfsCsvReader) -> tuple[list[CalendarItem], list[Exception]]:
    """Load calendar items from calendar.txt content."""
    return _load(_CALENDAR_HEADERS, reader, create_calendar_item)


def load_calendar_dates(reader: GtfsCsvReader) -> tuple[list[CalendarDate], list[Exception]]:
    """Load calendar dates from calendar_dates.txt content."""
    return _load(_CALENDAR_DATE_HEADERS, reader, create_calendar_date)


def load_shapes(reader: GtfsCsvReader) -> tuple[list[Shape], list[Exception]]:
    """Load shape points from shapes.txt content."""
    return _load(_SHAPE_HEADERS, reader, create_shape)