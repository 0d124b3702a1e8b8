"""Routes of routes.txt."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Mapping, Optional, Sequence

from ggtfs.agency import Agency
from ggtfs.fields import FieldType, string_is_nil_or_empty, validate_field
from ggtfs.notices import (
    AgencyIdRecommendedForRouteNotice,
    AgencyIdRequiredForRouteWhenMultipleAgenciesNotice,
    FieldIsNotUniqueNotice,
    ForeignKeyViolationNotice,
    MissingRouteLongNameWhenShortNameIsNotPresentNotice,
    MissingRouteShortNameWhenLongNameIsNotPresentNotice,
    RouteDescriptionDuplicatesNameNotice,
    TooLongRouteShortNameNotice,
    ValidationNotice,
)
from ggtfs.parsing import FILE_NAME_AGENCY, FILE_NAME_ROUTES, get_row_value_for_header_name

_MAX_SHORT_NAME_BYTES = 12


@dataclass
class Route:
    """One row of routes.txt; every field keeps its raw text."""

    id: Optional[str] = None  # route_id (required, unique)
    agency_id: Optional[str] = None  # agency_id (conditionally required)
    short_name: Optional[str] = None  # route_short_name (conditionally required)
    long_name: Optional[str] = None  # route_long_name (conditionally required)
    desc: Optional[str] = None  # route_desc (optional)
    type: Optional[str] = None  # route_type (required)
    url: Optional[str] = None  # route_url (optional)
    color: Optional[str] = None  # route_color (optional)
    text_color: Optional[str] = None  # route_text_color (optional)
    sort_order: Optional[str] = None  # route_sort_order (optional)
    continuous_pickup: Optional[str] = None  # continuous_pickup (conditionally forbidden)
    continuous_drop_off: Optional[str] = None  # continuous_drop_off (conditionally forbidden)
    network_id: Optional[str] = None  # network_id (conditionally forbidden)
    line_number: int = 0


_COLUMNS = {
    "route_id": "id",
    "agency_id": "agency_id",
    "route_short_name": "short_name",
    "route_long_name": "long_name",
    "route_desc": "desc",
    "route_type": "type",
    "route_url": "url",
    "route_color": "color",
    "route_text_color": "text_color",
    "route_sort_order": "sort_order",
    "continuous_pickup": "continuous_pickup",
    "continuous_drop_off": "continuous_drop_off",
    "network_id": "network_id",
}


def create_route(
    row: Optional[Sequence[str]], headers: Mapping[str, int], line_number: int
) -> Route:
    """Build a route from a CSV row and its header index."""
    values = {
        attribute: get_row_value_for_header_name(row, headers, header)
        for header, attribute in _COLUMNS.items()
        if header in headers
    }
    return Route(line_number=line_number, **values)


def _byte_length(value: str) -> int:
    return len(value.encode("utf-8", "surrogatepass"))


def validate_route(route: Route) -> list[ValidationNotice]:
    """Check the fields of one route and the rules between its names."""
    fields = (
        (FieldType.ID, "route_id", route.id, True),
        (FieldType.ID, "agency_id", route.agency_id, False),
        (FieldType.TEXT, "route_short_name", route.short_name, False),
        (FieldType.TEXT, "route_long_name", route.long_name, False),
        (FieldType.TEXT, "route_desc", route.desc, False),
        (FieldType.ROUTE_TYPE, "route_type", route.type, True),
        (FieldType.URL, "route_url", route.url, False),
        (FieldType.COLOR, "route_color", route.color, False),
        (FieldType.COLOR, "route_text_color", route.text_color, False),
        (FieldType.INTEGER, "route_sort_order", route.sort_order, False),
        (FieldType.CONTINUOUS_PICKUP, "continuous_pickup", route.continuous_pickup, False),
        (FieldType.CONTINUOUS_DROP_OFF, "continuous_drop_off", route.continuous_drop_off, False),
        (FieldType.ID, "network_id", route.network_id, False),
    )
    line = route.line_number
    results: list[ValidationNotice] = [
        notice
        for field_type, name, value, required in fields
        for notice in validate_field(field_type, name, value, required, FILE_NAME_ROUTES, line)
    ]

    if string_is_nil_or_empty(route.short_name) and string_is_nil_or_empty(route.long_name):
        results.append(
            MissingRouteShortNameWhenLongNameIsNotPresentNotice(
                FILE_NAME_ROUTES, "route_short_name", line
            )
        )
        results.append(
            MissingRouteLongNameWhenShortNameIsNotPresentNotice(
                FILE_NAME_ROUTES, "route_long_name", line
            )
        )

    if route.short_name is not None and _byte_length(route.short_name) >= _MAX_SHORT_NAME_BYTES:
        results.append(TooLongRouteShortNameNotice(FILE_NAME_ROUTES, "route_short_name", line))

    if route.desc is not None:
        for name_field, name_value in (
            ("route_short_name", route.short_name),
            ("route_long_name", route.long_name),
        ):
            if name_value is not None and route.desc == name_value:
                results.append(
                    RouteDescriptionDuplicatesNameNotice(
                        FILE_NAME_ROUTES, "route_desc", line, duplicating_field=name_field
                    )
                )

    return results


def validate_routes(
    routes: Optional[Iterable[Optional[Route]]],
    agencies: Optional[Iterable[Optional[Agency]]],
) -> list[ValidationNotice]:
    """Check all routes, route_id uniqueness and agency_id rules and references."""
    agency_list = None if agencies is None else list(agencies)

    agency_ids: set[str] = set()
    if agency_list is not None:
        agency_ids = {
            agency.id
            for agency in agency_list
            if agency is not None and not string_is_nil_or_empty(agency.id)
        }
    multiple_agencies = len(agency_ids) > 1

    results: list[ValidationNotice] = []
    used_ids: set[Optional[str]] = set()

    for route in routes or ():
        if route is None:
            continue

        results.extend(validate_route(route))
        line = route.line_number
        missing_agency_id = string_is_nil_or_empty(route.agency_id)

        # agency_id is required with several agencies, recommended otherwise.
        if missing_agency_id and multiple_agencies:
            results.append(
                AgencyIdRequiredForRouteWhenMultipleAgenciesNotice(
                    FILE_NAME_ROUTES, "agency_id", line
                )
            )
        elif missing_agency_id:
            results.append(AgencyIdRecommendedForRouteNotice(FILE_NAME_ROUTES, "agency_id", line))

        if route.id in used_ids:
            results.append(FieldIsNotUniqueNotice(FILE_NAME_ROUTES, "route_id", line))
        else:
            used_ids.add(route.id)

        if agency_list is None or missing_agency_id:
            continue

        matching = any(
            agency is not None and agency.id is not None and agency.id == route.agency_id
            for agency in agency_list
        )
        if not matching:
            results.append(
                ForeignKeyViolationNotice(
                    referencing_file_name=FILE_NAME_ROUTES,
                    referencing_field_name="agency_id",
                    referenced_field_name=FILE_NAME_AGENCY,
                    referenced_file_name="agency_id",
                    offending_value=route.agency_id,
                    referenced_at_row=line,
                )
            )

    return results