"""Stop times of stop_times.txt."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Mapping, Optional, Sequence

from ggtfs.fields import FieldType, validate_field
from ggtfs.notices import ForeignKeyViolationNotice, ValidationNotice
from ggtfs.parsing import FILE_NAME_STOP_TIMES, FILE_NAME_STOPS, get_row_value_for_header_name
from ggtfs.stop import Stop


@dataclass
class StopTime:
    """One row of stop_times.txt; every field keeps its raw text."""

    trip_id: Optional[str] = None  # trip_id (required)
    arrival_time: Optional[str] = None  # arrival_time (conditionally required)
    departure_time: Optional[str] = None  # departure_time (conditionally required)
    stop_id: Optional[str] = None  # stop_id (conditionally required)
    location_group_id: Optional[str] = None  # location_group_id (conditionally forbidden)
    location_id: Optional[str] = None  # location_id (conditionally forbidden)
    stop_sequence: Optional[str] = None  # stop_sequence (required)
    stop_headsign: Optional[str] = None  # stop_headsign (optional)
    start_pickup_drop_off_window: Optional[str] = None  # (conditionally required)
    end_pickup_drop_off_window: Optional[str] = None  # (conditionally required)
    pickup_type: Optional[str] = None  # pickup_type (conditionally required)
    drop_off_type: Optional[str] = None  # drop_off_type (conditionally required)
    continuous_pickup: Optional[str] = None  # continuous_pickup (conditionally required)
    continuous_drop_off: Optional[str] = None  # continuous_drop_off (conditionally required)
    shape_dist_traveled: Optional[str] = None  # shape_dist_traveled (optional)
    timepoint: Optional[str] = None  # timepoint (optional)
    pickup_booking_rule_id: Optional[str] = None  # pickup_booking_rule_id (optional)
    drop_off_booking_rule_id: Optional[str] = None  # drop_off_booking_rule_id (optional)
    line_number: int = 0


_COLUMNS = (
    "trip_id",
    "arrival_time",
    "departure_time",
    "stop_id",
    "location_group_id",
    "location_id",
    "stop_sequence",
    "stop_headsign",
    "start_pickup_drop_off_window",
    "end_pickup_drop_off_window",
    "pickup_type",
    "drop_off_type",
    "continuous_pickup",
    "continuous_drop_off",
    "shape_dist_traveled",
    "timepoint",
    "pickup_booking_rule_id",
    "drop_off_booking_rule_id",
)


def create_stop_time(
    row: Optional[Sequence[str]], headers: Mapping[str, int], line_number: int
) -> StopTime:
    """Build a stop time from a CSV row and its header index."""
    values = {
        column: get_row_value_for_header_name(row, headers, column)
        for column in _COLUMNS
        if column in headers
    }
    return StopTime(line_number=line_number, **values)


def validate_stop_time(stop_time: StopTime) -> list[ValidationNotice]:
    """Check the fields of one stop time."""
    st = stop_time
    fields = (
        (FieldType.ID, "trip_id", st.trip_id, True),
        (FieldType.TIME, "arrival_time", st.arrival_time, False),
        (FieldType.TIME, "departure_time", st.departure_time, False),
        (FieldType.ID, "stop_id", st.stop_id, False),
        (FieldType.ID, "location_group_id", st.location_group_id, False),
        (FieldType.ID, "location_id", st.location_id, False),
        (FieldType.INTEGER, "stop_sequence", st.stop_sequence, True),
        (FieldType.TEXT, "stop_headsign", st.stop_headsign, False),
        (FieldType.TIME, "start_pickup_drop_off_window", st.start_pickup_drop_off_window, False),
        (FieldType.TIME, "end_pickup_drop_off_window", st.end_pickup_drop_off_window, False),
        (FieldType.PICKUP_TYPE, "pickup_type", st.pickup_type, False),
        (FieldType.DROP_OFF_TYPE, "drop_off_type", st.drop_off_type, False),
        (FieldType.CONTINUOUS_PICKUP, "continuous_pickup", st.continuous_pickup, False),
        (FieldType.CONTINUOUS_DROP_OFF, "continuous_drop_off", st.continuous_drop_off, False),
        (FieldType.FLOAT, "shape_dist_traveled", st.shape_dist_traveled, False),
        (FieldType.TIMEPOINT, "timepoint", st.timepoint, False),
        (FieldType.ID, "pickup_booking_rule_id", st.pickup_booking_rule_id, False),
        (FieldType.ID, "drop_off_booking_rule_id", st.drop_off_booking_rule_id, False),
    )
    return [
        notice
        for field_type, name, value, required in fields
        for notice in validate_field(
            field_type, name, value, required, FILE_NAME_STOP_TIMES, st.line_number
        )
    ]


def validate_stop_times(
    stop_times: Optional[Iterable[Optional[StopTime]]],
    stops: Optional[Iterable[Optional[Stop]]],
) -> list[ValidationNotice]:
    """Check every stop time and that its stop_id refers to a known stop.

    When no stops are given at all, every stop time's stop_id is reported.
    """
    stop_ids = {stop.id for stop in stops or () if stop is not None}
    results: list[ValidationNotice] = []

    for stop_time in stop_times or ():
        if stop_time is None:
            continue

        results.extend(validate_stop_time(stop_time))

        if stop_time.stop_id in stop_ids:
            continue
        results.append(
            ForeignKeyViolationNotice(
                referencing_file_name=FILE_NAME_STOP_TIMES,
                referencing_field_name="stop_id",
                referenced_field_name=FILE_NAME_STOPS,
                referenced_file_name="stop_id",
                offending_value=stop_time.stop_id,
                referenced_at_row=stop_time.line_number,
            )
        )

    return results