"""Reading header rows and row values of GTFS CSV files."""

from __future__ import annotations

import csv
from typing import Iterable, Mapping, Optional, Sequence

FILE_NAME_AGENCY = "agency.txt"
FILE_NAME_CALENDAR = "calendar.txt"
FILE_NAME_CALENDAR_DATE = "calendar_dates.txt"
FILE_NAME_ROUTES = "routes.txt"
FILE_NAME_SHAPES = "shapes.txt"
FILE_NAME_STOPS = "stops.txt"
FILE_NAME_STOP_TIMES = "stop_times.txt"
FILE_NAME_TRIPS = "trips.txt"


def get_row_value_for_header_name(
    row: Optional[Sequence[str]],
    headers: Mapping[str, int],
    header_name: str,
) -> Optional[str]:
    """Return the row's value in the named column, or None when it has none."""
    values = row or ()
    position = headers.get(header_name, -1)
    if position < 0 or position >= len(values):
        return None
    return values[position]


def get_header_index(
    rows: Iterable[Sequence[str]],
    valid_header_list: Iterable[str],
) -> tuple[dict[str, int], list[Exception]]:
    """Read the header row and map each header name to its column.

    Only the header row is consumed from ``rows``; blank rows before it are
    skipped. Unknown headers map to -1. Duplicate known headers are reported
    in the returned error list and keep their first position.
    """
    iterator = iter(rows)
    try:
        header_row = next((row for row in iterator if row), None)
    except csv.Error as err:
        return {}, [err]

    if header_row is None:
        return {}, []

    valid_headers = set(valid_header_list)
    index: dict[str, int] = {}
    errors: list[Exception] = []
    seen: set[str] = set()

    for position, raw_header in enumerate(header_row):
        header = raw_header.strip()
        if header in seen:
            errors.append(ValueError(f"duplicate header name: {header}"))
            continue
        if header not in valid_headers:
            index[header] = -1
            continue
        seen.add(header)
        index[header] = position

    return index, errors