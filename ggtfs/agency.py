"""Agencies of agency.txt."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Mapping, Optional, Sequence

from ggtfs.fields import FieldType, string_is_nil_or_empty, validate_field
from ggtfs.notices import (
    FieldIsNotUniqueNotice,
    SingleAgencyRecommendedNotice,
    ValidAgencyIdRequiredWhenMultipleAgenciesNotice,
    ValidationNotice,
)
from ggtfs.parsing import FILE_NAME_AGENCY, get_row_value_for_header_name


@dataclass
class Agency:
    """One row of agency.txt; every field keeps its raw text."""

    id: Optional[str] = None  # agency_id (conditionally required)
    name: Optional[str] = None  # agency_name (required)
    url: Optional[str] = None  # agency_url (required)
    timezone: Optional[str] = None  # agency_timezone (required)
    lang: Optional[str] = None  # agency_lang (optional)
    phone: Optional[str] = None  # agency_phone (optional)
    fare_url: Optional[str] = None  # agency_fare_url (optional)
    email: Optional[str] = None  # agency_email (optional)
    line_number: int = 0


_COLUMNS = {
    "agency_id": "id",
    "agency_name": "name",
    "agency_url": "url",
    "agency_timezone": "timezone",
    "agency_lang": "lang",
    "agency_phone": "phone",
    "agency_fare_url": "fare_url",
    "agency_email": "email",
}


def create_agency(
    row: Optional[Sequence[str]], headers: Mapping[str, int], line_number: int
) -> Agency:
    """Build an agency from a CSV row and its header index."""
    values = {
        attribute: get_row_value_for_header_name(row, headers, header)
        for header, attribute in _COLUMNS.items()
        if header in headers
    }
    return Agency(line_number=line_number, **values)


def validate_agency(agency: Agency) -> list[ValidationNotice]:
    """Check the fields of one agency."""
    fields = (
        (FieldType.ID, "agency_id", agency.id, False),
        (FieldType.TEXT, "agency_name", agency.name, True),
        (FieldType.URL, "agency_url", agency.url, True),
        (FieldType.TIMEZONE, "agency_timezone", agency.timezone, True),
        (FieldType.LANGUAGE_CODE, "agency_lang", agency.lang, False),
        (FieldType.PHONE_NUMBER, "agency_phone", agency.phone, False),
        # The agency_fare_url check is made on agency_url's value.
        (FieldType.URL, "agency_fare_url", agency.url, False),
        (FieldType.EMAIL, "agency_email", agency.email, False),
    )
    return [
        notice
        for field_type, name, value, required in fields
        for notice in validate_field(
            field_type, name, value, required, FILE_NAME_AGENCY, agency.line_number
        )
    ]


def validate_agencies(agencies: Optional[Iterable[Optional[Agency]]]) -> list[ValidationNotice]:
    """Check all agencies, including agency_id rules across the file."""
    present = [agency for agency in agencies or () if agency is not None]

    if not present:
        return []

    if len(present) == 1:
        if string_is_nil_or_empty(present[0].id):
            return [SingleAgencyRecommendedNotice(file_name=FILE_NAME_AGENCY)]
        return validate_agency(present[0])

    results: list[ValidationNotice] = []
    used_ids: set[str] = set()
    for agency in present:
        results.extend(validate_agency(agency))

        if string_is_nil_or_empty(agency.id):
            results.append(
                ValidAgencyIdRequiredWhenMultipleAgenciesNotice(
                    file_name=FILE_NAME_AGENCY, line=agency.line_number
                )
            )
            continue

        if agency.id in used_ids:
            results.append(
                FieldIsNotUniqueNotice(FILE_NAME_AGENCY, "agency_id", agency.line_number)
            )
        else:
            used_ids.add(agency.id)

    return results