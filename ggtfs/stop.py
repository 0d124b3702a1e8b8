"""Stops of stops.txt."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Mapping, Optional, Sequence

from ggtfs.fields import (
    FieldType,
    is_location_type_valid,
    string_is_nil_or_empty,
    validate_field,
)
from ggtfs.notices import (
    FieldIsNotUniqueNotice,
    FieldRequiredForStopLocationTypeNotice,
    ValidationNotice,
)
from ggtfs.parsing import FILE_NAME_STOPS, get_row_value_for_header_name


@dataclass
class StopExtensions:
    """Fields of stops.txt outside the GTFS specification."""

    municipality_id: Optional[str] = None  # municipality_id (optional)


@dataclass
class Stop:
    """One row of stops.txt; every field keeps its raw text."""

    id: Optional[str] = None  # stop_id (required)
    code: Optional[str] = None  # stop_code (optional)
    name: Optional[str] = None  # stop_name (conditionally required)
    tts_name: Optional[str] = None  # tts_stop_name (optional)
    desc: Optional[str] = None  # stop_desc (optional)
    lat: Optional[str] = None  # stop_lat (conditionally required)
    lon: Optional[str] = None  # stop_lon (conditionally required)
    zone_id: Optional[str] = None  # zone_id (optional)
    url: Optional[str] = None  # stop_url (optional)
    location_type: Optional[str] = None  # location_type (optional)
    parent_station: Optional[str] = None  # parent_station (conditionally required)
    timezone: Optional[str] = None  # stop_timezone (optional)
    wheelchair_boarding: Optional[str] = None  # wheelchair_boarding (optional)
    platform_code: Optional[str] = None  # platform_code (optional)
    level_id: Optional[str] = None  # level_id (optional)
    extensions: Optional[StopExtensions] = None
    line_number: int = 0


_COLUMNS = {
    "stop_id": "id",
    "stop_code": "code",
    "stop_name": "name",
    "tts_stop_name": "tts_name",
    "stop_desc": "desc",
    "stop_lat": "lat",
    "stop_lon": "lon",
    "zone_id": "zone_id",
    "stop_url": "url",
    "location_type": "location_type",
    "parent_station": "parent_station",
    "stop_timezone": "timezone",
    "wheelchair_boarding": "wheelchair_boarding",
    "level_id": "level_id",
    "platform_code": "platform_code",
}

_NEEDS_POSITION = ("0", "1", "2")
_NEEDS_PARENT = ("2", "3", "4")


def create_stop(
    row: Optional[Sequence[str]], headers: Mapping[str, int], line_number: int
) -> Stop:
    """Build a stop from a CSV row and its header index."""
    values = {
        attribute: get_row_value_for_header_name(row, headers, header)
        for header, attribute in _COLUMNS.items()
        if header in headers
    }
    if "municipality_id" in headers:
        values["extensions"] = StopExtensions(
            municipality_id=get_row_value_for_header_name(row, headers, "municipality_id")
        )
    return Stop(line_number=line_number, **values)


def validate_stop(stop: Stop) -> list[ValidationNotice]:
    """Check the fields of one stop and the fields its location type requires."""
    fields = (
        (FieldType.ID, "stop_id", stop.id, True),
        (FieldType.TEXT, "stop_code", stop.code, False),
        (FieldType.TEXT, "stop_name", stop.name, False),
        (FieldType.TEXT, "tts_stop_name", stop.tts_name, False),
        (FieldType.TEXT, "stop_desc", stop.desc, False),
        (FieldType.ID, "zone_id", stop.zone_id, False),
        (FieldType.URL, "stop_url", stop.url, False),
        (FieldType.LOCATION_TYPE, "location_type", stop.location_type, False),
        (FieldType.ID, "parent_station", stop.parent_station, False),
        (FieldType.TIMEZONE, "stop_timezone", stop.timezone, False),
        (FieldType.WHEELCHAIR_BOARDING, "wheelchair_boarding", stop.wheelchair_boarding, False),
        (FieldType.ID, "level_id", stop.level_id, False),
        (FieldType.TEXT, "platform_code", stop.platform_code, False),
    )
    results: list[ValidationNotice] = [
        notice
        for field_type, name, value, required in fields
        for notice in validate_field(
            field_type, name, value, required, FILE_NAME_STOPS, stop.line_number
        )
    ]

    if not is_location_type_valid(stop.location_type):
        return results
    location_type = stop.location_type

    def required(field_name: str) -> FieldRequiredForStopLocationTypeNotice:
        return FieldRequiredForStopLocationTypeNotice(
            required_field=field_name,
            location_type=location_type,
            file_name=FILE_NAME_STOPS,
            line=stop.line_number,
        )

    if location_type in _NEEDS_POSITION:
        results.extend(
            required(field_name)
            for field_name, value in (
                ("stop_name", stop.name),
                ("stop_lat", stop.lat),
                ("stop_lon", stop.lon),
            )
            if string_is_nil_or_empty(value)
        )

    if location_type in _NEEDS_PARENT and string_is_nil_or_empty(stop.parent_station):
        results.append(required("parent_station"))

    return results


def validate_stops(stops: Optional[Iterable[Optional[Stop]]]) -> list[ValidationNotice]:
    """Check every stop and that stop_id values are unique."""
    results: list[ValidationNotice] = []
    used_ids: set[str] = set()

    for stop in stops or ():
        if stop is None:
            continue

        results.extend(validate_stop(stop))

        if string_is_nil_or_empty(stop.id):
            continue

        if stop.id in used_ids:
            results.append(FieldIsNotUniqueNotice(FILE_NAME_STOPS, "stop_id", stop.line_number))
        else:
            used_ids.add(stop.id)

    return results