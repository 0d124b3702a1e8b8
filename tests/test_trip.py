import pytest

from ggtfs.calendar import CalendarItem
from ggtfs.notices import (
    ForeignKeyViolationNotice,
    InvalidBikesAllowedNotice,
    InvalidDirectionIdNotice,
    InvalidWheelchairAccessibleNotice,
    MissingRequiredFieldNotice,
)
from ggtfs.route import Route
from ggtfs.shape import Shape
from ggtfs.trip import Trip, create_trip, validate_trip, validate_trips

HEADERS = {
    "route_id": 0,
    "service_id": 1,
    "trip_id": 2,
    "trip_headsign": 3,
    "trip_short_name": 4,
    "direction_id": 5,
    "block_id": 6,
    "shape_id": 7,
    "wheelchair_accessible": 8,
    "bikes_allowed": 9,
}


def test_create_trip_empty_row():
    result = create_trip([""] * 10, HEADERS, 0)
    assert result == Trip(
        route_id="",
        service_id="",
        id="",
        head_sign="",
        short_name="",
        direction_id="",
        block_id="",
        shape_id="",
        wheelchair_accessible="",
        bikes_allowed="",
        line_number=0,
    )


def test_create_trip_nil_values():
    assert create_trip(None, HEADERS, 0) == Trip(line_number=0)


def test_create_trip_ok():
    row = ["route id", "service id", "trip id", "headsign", "shortname", "0", "block id",
           "shape id", "1", "2"]
    assert create_trip(row, HEADERS, 0) == Trip(
        route_id="route id",
        service_id="service id",
        id="trip id",
        head_sign="headsign",
        short_name="shortname",
        direction_id="0",
        block_id="block id",
        shape_id="shape id",
        wheelchair_accessible="1",
        bikes_allowed="2",
        line_number=0,
    )


@pytest.mark.parametrize("trips", [None, [None]])
def test_validate_trips_nil(trips):
    assert validate_trips(trips, None, None, None) == []


def test_validate_trips_invalid_fields():
    trip = Trip(
        route_id="route id",
        service_id="service id",
        id="trip id",
        direction_id="3",
        wheelchair_accessible="5",
        bikes_allowed="5",
    )
    assert validate_trips([trip], None, None, None) == [
        InvalidDirectionIdNotice("trips.txt", "direction_id", 0),
        InvalidWheelchairAccessibleNotice("trips.txt", "wheelchair_accessible", 0),
        InvalidBikesAllowedNotice("trips.txt", "bikes_allowed", 0),
    ]


def test_validate_trips_missing_foreign_keys():
    trip = Trip(route_id="ROUTE_1", service_id="SERVICE_1", shape_id="SHAPE_1", id="trip id")
    results = validate_trips([trip], [], [], [])
    assert results == [
        ForeignKeyViolationNotice(
            referencing_file_name="trips.txt",
            referencing_field_name="route_id",
            referenced_field_name="route_id",
            referenced_file_name="routes.txt",
            offending_value="ROUTE_1",
            referenced_at_row=0,
        ),
        ForeignKeyViolationNotice(
            referencing_file_name="trips.txt",
            referencing_field_name="service_id",
            referenced_field_name="service_id",
            referenced_file_name="calendar.txt",
            offending_value="SERVICE_1",
            referenced_at_row=0,
        ),
        ForeignKeyViolationNotice(
            referencing_file_name="trips.txt",
            referencing_field_name="shape_id",
            referenced_field_name="shape_id",
            referenced_file_name="shapes.txt",
            offending_value="SHAPE_1",
            referenced_at_row=0,
        ),
    ]


def test_validate_trips_matching_foreign_keys():
    trip = Trip(route_id="R", service_id="S", shape_id="SH", id="T")
    results = validate_trips(
        [trip],
        [None, Route(id="R")],
        [None, CalendarItem(service_id="S")],
        [None, Shape(id="SH")],
    )
    assert results == []


def test_validate_trips_empty_shape_id_is_not_checked():
    trip = Trip(route_id="R", service_id="S", shape_id="", id="T")
    assert validate_trips([trip], None, None, []) == []


def test_validate_trip_missing_required_fields():
    assert validate_trip(Trip(line_number=2)) == [
        MissingRequiredFieldNotice("trips.txt", "trip_id", 2),
        MissingRequiredFieldNotice("trips.txt", "route_id", 2),
        MissingRequiredFieldNotice("trips.txt", "service_id", 2),
    ]