import pytest

from ggtfs.agency import Agency
from ggtfs.notices import (
    AgencyIdRecommendedForRouteNotice,
    AgencyIdRequiredForRouteWhenMultipleAgenciesNotice,
    FieldIsNotUniqueNotice,
    ForeignKeyViolationNotice,
    InvalidColorNotice,
    InvalidIntegerNotice,
    InvalidURLNotice,
    MissingRouteLongNameWhenShortNameIsNotPresentNotice,
    MissingRouteShortNameWhenLongNameIsNotPresentNotice,
    RouteDescriptionDuplicatesNameNotice,
    TooLongRouteShortNameNotice,
)
from ggtfs.route import Route, create_route, validate_route, validate_routes

HEADERS = {
    "route_id": 0,
    "agency_id": 1,
    "route_short_name": 2,
    "route_long_name": 3,
    "route_desc": 4,
    "route_type": 5,
    "route_url": 6,
    "route_color": 7,
    "route_text_color": 8,
    "route_sort_order": 9,
    "continuous_pickup": 10,
    "continuous_drop_off": 11,
    "network_id": 12,
}


def test_create_route_empty_row():
    route = create_route([""] * 13, HEADERS, 0)
    assert route == Route(
        id="",
        agency_id="",
        short_name="",
        long_name="",
        desc="",
        type="",
        url="",
        color="",
        text_color="",
        sort_order="",
        continuous_pickup="",
        continuous_drop_off="",
        network_id="",
        line_number=0,
    )


def test_create_route_nil_values():
    assert create_route(None, HEADERS, 0) == Route(line_number=0)


def test_create_route_ok():
    row = [
        "1", "Agency", "route1", "route 1", "route description", "3",
        "https://acme.inc/1", "FFFFFF", "FFF000", "1", "2", "3", "network",
    ]
    assert create_route(row, HEADERS, 0) == Route(
        id="1",
        agency_id="Agency",
        short_name="route1",
        long_name="route 1",
        desc="route description",
        type="3",
        url="https://acme.inc/1",
        color="FFFFFF",
        text_color="FFF000",
        sort_order="1",
        continuous_pickup="2",
        continuous_drop_off="3",
        network_id="network",
        line_number=0,
    )


def test_create_route_keeps_line_number():
    assert create_route(["7"], {"route_id": 0}, 42) == Route(id="7", line_number=42)


def _valid_route(**overrides):
    values = dict(
        id="1",
        agency_id="Agency",
        short_name="route1",
        long_name="route 1",
        desc="route description",
        type="3",
        url="https://acme.inc/1",
        color="FFFFFF",
        text_color="FFF000",
        sort_order="1",
        continuous_pickup="2",
        continuous_drop_off="3",
        network_id="network",
    )
    values.update(overrides)
    return Route(**values)


@pytest.mark.parametrize("routes", [None, [None]])
def test_validate_routes_empty_inputs(routes):
    assert validate_routes(routes, None) == []


def test_validate_routes_invalid_fields():
    route = _valid_route(
        short_name="a way too long short name",
        type="8",
        url="Not an URL",
        color="not a color",
        text_color="not a color",
        sort_order="not an integer",
        continuous_pickup="4",
        continuous_drop_off="4",
    )
    assert validate_routes([route], None) == [
        InvalidURLNotice("routes.txt", "route_url", 0),
        InvalidColorNotice("routes.txt", "route_color", 0),
        InvalidColorNotice("routes.txt", "route_text_color", 0),
        InvalidIntegerNotice("routes.txt", "route_sort_order", 0),
        TooLongRouteShortNameNotice("routes.txt", "route_short_name", 0),
    ]


def test_validate_routes_empty_short_and_long_name():
    route = _valid_route(short_name="", long_name="")
    assert validate_routes([route], None) == [
        MissingRouteShortNameWhenLongNameIsNotPresentNotice("routes.txt", "route_short_name", 0),
        MissingRouteLongNameWhenShortNameIsNotPresentNotice("routes.txt", "route_long_name", 0),
    ]


def test_validate_routes_desc_duplicates_route_names():
    route = _valid_route(short_name="route1", long_name="route1", desc="route1")
    assert validate_routes([route], None) == [
        RouteDescriptionDuplicatesNameNotice(
            "routes.txt", "route_desc", 0, duplicating_field="route_short_name"
        ),
        RouteDescriptionDuplicatesNameNotice(
            "routes.txt", "route_desc", 0, duplicating_field="route_long_name"
        ),
    ]


def test_validate_routes_agency_id_required_when_multiple_agencies():
    route = Route(id="1", agency_id="", short_name="route1", long_name="route 1", type="3")
    agencies = [Agency(id="111"), Agency(id="112"), Agency(id=""), Agency(id=None)]
    assert validate_routes([route], agencies) == [
        AgencyIdRequiredForRouteWhenMultipleAgenciesNotice("routes.txt", "agency_id", 0)
    ]


def test_validate_routes_recommend_agency_id():
    route = Route(id="1", agency_id="", short_name="route1", long_name="route 1", type="3")
    assert validate_routes([route], None) == [
        AgencyIdRecommendedForRouteNotice("routes.txt", "agency_id", 0)
    ]


def test_validate_routes_duplicate_agency_ids_count_once():
    route = Route(id="1", agency_id=None, short_name="route1", long_name="route 1", type="3")
    agencies = [Agency(id="111"), Agency(id="111")]
    assert validate_routes([route], agencies) == [
        AgencyIdRecommendedForRouteNotice("routes.txt", "agency_id", 0)
    ]


def test_validate_routes_unique_route_id():
    routes = [
        Route(id="1", agency_id="agency", short_name="route1", long_name="route 1", type="3"),
        Route(id="1", agency_id="agency", short_name="route1", long_name="route 1", type="3"),
    ]
    assert validate_routes(routes, None) == [
        FieldIsNotUniqueNotice("routes.txt", "route_id", 0)
    ]


def test_validate_routes_foreign_key_failure():
    route = Route(id="1", agency_id="113", short_name="route1", long_name="route 1", type="3")
    agencies = [Agency(id="111"), Agency(id="112"), Agency(id=""), Agency(id=None)]
    assert validate_routes([route], agencies) == [
        ForeignKeyViolationNotice(
            referencing_file_name="routes.txt",
            referencing_field_name="agency_id",
            referenced_field_name="agency.txt",
            referenced_file_name="agency_id",
            offending_value="113",
            referenced_at_row=0,
        )
    ]


def test_validate_routes_foreign_key_ok():
    route = Route(id="1", agency_id="113", short_name="route1", long_name="route 1", type="3")
    agencies = [Agency(id="113"), Agency(id="112")]
    assert validate_routes([route], agencies) == []


def test_validate_route_missing_required_fields():
    notices = validate_route(Route(short_name="r", line_number=5))
    assert [(n.code, n.field_name, n.line) for n in notices] == [
        ("missing_required_field", "route_id", 5),
        ("missing_required_field", "route_type", 5),
    ]


def test_short_name_length_boundary():
    assert validate_route(_valid_route(short_name="a" * 11)) == []
    assert validate_route(_valid_route(short_name="a" * 12)) == [
        TooLongRouteShortNameNotice("routes.txt", "route_short_name", 0)
    ]