"""Validation notices produced when checking GTFS feed contents."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import ClassVar


class ValidationNoticeSeverity(IntEnum):
    """How serious a validation notice is."""

    INFO = 1
    RECOMMENDATION = 2
    VIOLATION = 3


class ValidationNotice:
    """Base class of every validation notice."""

    code: ClassVar[str] = "validation_notice"
    severity: ClassVar[ValidationNoticeSeverity] = ValidationNoticeSeverity.VIOLATION

    def as_text(self) -> str:
        """Return a one-line, human-readable description of the notice."""
        return self.code

    def __str__(self) -> str:
        return self.as_text()


@dataclass(frozen=True)
class SingleLineNotice(ValidationNotice):
    """A notice about one field on one line of one file."""

    file_name: str = ""
    field_name: str = ""
    line: int = 0

    def as_text(self) -> str:
        return f"{self.code} in {self.file_name}->{self.field_name} (line {self.line})"


@dataclass(frozen=True)
class InvalidCharacterNotice(SingleLineNotice):
    code: ClassVar[str] = "invalid_characters"


@dataclass(frozen=True)
class InvalidURLNotice(SingleLineNotice):
    code: ClassVar[str] = "invalid_url"


@dataclass(frozen=True)
class InvalidColorNotice(SingleLineNotice):
    code: ClassVar[str] = "invalid_color"


@dataclass(frozen=True)
class InvalidIntegerNotice(SingleLineNotice):
    code: ClassVar[str] = "invalid_integer"


@dataclass(frozen=True)
class InvalidFloatNotice(SingleLineNotice):
    code: ClassVar[str] = "invalid_float"


@dataclass(frozen=True)
class InvalidTimeNotice(SingleLineNotice):
    code: ClassVar[str] = "invalid_time"


@dataclass(frozen=True)
class InvalidCurrencyCodeNotice(SingleLineNotice):
    code: ClassVar[str] = "invalid_currency_code"


@dataclass(frozen=True)
class InvalidCurrencyAmountNotice(SingleLineNotice):
    code: ClassVar[str] = "invalid_currency_amount"


@dataclass(frozen=True)
class InvalidDateNotice(SingleLineNotice):
    code: ClassVar[str] = "invalid_date"


@dataclass(frozen=True)
class InvalidLatitudeNotice(SingleLineNotice):
    code: ClassVar[str] = "invalid_latitude"


@dataclass(frozen=True)
class InvalidLongitudeNotice(SingleLineNotice):
    code: ClassVar[str] = "invalid_longitude"


@dataclass(frozen=True)
class InvalidLanguageCodeNotice(SingleLineNotice):
    code: ClassVar[str] = "invalid_language_code"


@dataclass(frozen=True)
class InvalidPhoneNumberNotice(SingleLineNotice):
    code: ClassVar[str] = "invalid_phone_number"


@dataclass(frozen=True)
class InvalidEmailNotice(SingleLineNotice):
    code: ClassVar[str] = "invalid_email"


@dataclass(frozen=True)
class InvalidTimezoneNotice(SingleLineNotice):
    code: ClassVar[str] = "invalid_timezone"


@dataclass(frozen=True)
class InvalidCalendarDayNotice(SingleLineNotice):
    code: ClassVar[str] = "invalid_calendar_day"


@dataclass(frozen=True)
class InvalidCalendarExceptionNotice(SingleLineNotice):
    code: ClassVar[str] = "invalid_calendar_exception"


@dataclass(frozen=True)
class MissingRequiredFieldNotice(SingleLineNotice):
    code: ClassVar[str] = "missing_required_field"


@dataclass(frozen=True)
class SingleAgencyRecommendedNotice(ValidationNotice):
    """A lone agency should still carry an agency_id."""

    code: ClassVar[str] = "single_agency_recommended"
    severity: ClassVar[ValidationNoticeSeverity] = ValidationNoticeSeverity.RECOMMENDATION

    file_name: str = ""

    def as_text(self) -> str:
        return f"{self.code} in {self.file_name}"


@dataclass(frozen=True)
class ValidAgencyIdRequiredWhenMultipleAgenciesNotice(ValidationNotice):
    """Every agency needs an agency_id when there are several agencies."""

    code: ClassVar[str] = "valid_agency_id_required_when_multiple_agencies"

    file_name: str = ""
    line: int = 0

    def as_text(self) -> str:
        return f"{self.code} in {self.file_name} -> agency_id (line {self.line})"


@dataclass(frozen=True)
class FieldIsNotUniqueNotice(SingleLineNotice):
    code: ClassVar[str] = "field_is_not_unique"


@dataclass(frozen=True)
class InvalidRouteTypeNotice(SingleLineNotice):
    code: ClassVar[str] = "invalid_route_type"


@dataclass(frozen=True)
class InvalidContinuousPickupNotice(SingleLineNotice):
    code: ClassVar[str] = "invalid_continuous_pickup"


@dataclass(frozen=True)
class InvalidContinuousDropOffNotice(SingleLineNotice):
    code: ClassVar[str] = "invalid_continuous_drop_off"


@dataclass(frozen=True)
class InvalidPickupTypeNotice(SingleLineNotice):
    code: ClassVar[str] = "invalid_pickup_type"


@dataclass(frozen=True)
class InvalidDropOffTypeNotice(SingleLineNotice):
    code: ClassVar[str] = "invalid_drop_off_type"


@dataclass(frozen=True)
class InvalidTimepointNotice(SingleLineNotice):
    code: ClassVar[str] = "invalid_timepoint"


@dataclass(frozen=True)
class InvalidDirectionIdNotice(SingleLineNotice):
    code: ClassVar[str] = "invalid_direction_id"


@dataclass(frozen=True)
class InvalidWheelchairAccessibleNotice(SingleLineNotice):
    code: ClassVar[str] = "invalid_wheelchair_accessible"


@dataclass(frozen=True)
class InvalidBikesAllowedNotice(SingleLineNotice):
    code: ClassVar[str] = "invalid_bikes_allowed"


@dataclass(frozen=True)
class MissingRouteShortNameWhenLongNameIsNotPresentNotice(SingleLineNotice):
    code: ClassVar[str] = "missing_route_short_name_when_long_name_is_not_present"


@dataclass(frozen=True)
class MissingRouteLongNameWhenShortNameIsNotPresentNotice(SingleLineNotice):
    code: ClassVar[str] = "missing_route_long_name_when_short_name_is_not_present"


@dataclass(frozen=True)
class TooLongRouteShortNameNotice(SingleLineNotice):
    code: ClassVar[str] = "too_long_route_short_name"
    severity: ClassVar[ValidationNoticeSeverity] = ValidationNoticeSeverity.RECOMMENDATION


@dataclass(frozen=True)
class RouteDescriptionDuplicatesNameNotice(SingleLineNotice):
    """route_desc repeats the route's short or long name."""

    code: ClassVar[str] = "description_duplicates_route_name"
    severity: ClassVar[ValidationNoticeSeverity] = ValidationNoticeSeverity.RECOMMENDATION

    duplicating_field: str = ""


@dataclass(frozen=True)
class AgencyIdRequiredForRouteWhenMultipleAgenciesNotice(SingleLineNotice):
    code: ClassVar[str] = "agency_id_required_for_route_when_multiple_agencies"


@dataclass(frozen=True)
class AgencyIdRecommendedForRouteNotice(SingleLineNotice):
    code: ClassVar[str] = "agency_id_recommended_for_route"
    severity: ClassVar[ValidationNoticeSeverity] = ValidationNoticeSeverity.RECOMMENDATION


@dataclass(frozen=True)
class InvalidLocationTypeNotice(SingleLineNotice):
    code: ClassVar[str] = "invalid_location_type"


@dataclass(frozen=True)
class InvalidWheelchairBoardingValueNotice(SingleLineNotice):
    code: ClassVar[str] = "invalid_wheelchair_boarding_value"


@dataclass(frozen=True)
class TooFewShapePointsNotice(ValidationNotice):
    """A shape has fewer than two points."""

    code: ClassVar[str] = "too_few_shape_points"

    file_name: str = ""
    shape_id: str = ""

    def as_text(self) -> str:
        return f"{self.code} in {self.file_name} (shape {self.shape_id})"


@dataclass(frozen=True)
class FieldRequiredForStopLocationTypeNotice(ValidationNotice):
    """A stop lacks a field its location type requires."""

    code: ClassVar[str] = "field_required_for_location_type"

    required_field: str = ""
    location_type: str = ""
    file_name: str = ""
    line: int = 0

    def as_text(self) -> str:
        return f"{self.code} {self.required_field} in {self.file_name} (line {self.line})"


@dataclass(frozen=True)
class ForeignKeyViolationNotice(ValidationNotice):
    """A value refers to a record that does not exist in the referenced file."""

    code: ClassVar[str] = "foreign_key_violation"

    referencing_file_name: str = ""
    referencing_field_name: str = ""
    referenced_field_name: str = ""
    referenced_file_name: str = ""
    offending_value: str = ""
    referenced_at_row: int = 0

    def as_text(self) -> str:
        return (
            f"{self.code} from {self.referencing_file_name}:{self.referenced_at_row}"
            f"->{self.referencing_field_name}(value: {self.offending_value})"
            f" to {self.referenced_file_name}->{self.referenced_field_name}"
        )