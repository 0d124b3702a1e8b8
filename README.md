# ggtfs

Load and validate the text files of a GTFS static transit feed.

`ggtfs` reads the following files into plain Python dataclasses:

- `agency.txt`
- `routes.txt`
- `stops.txt`
- `trips.txt`
- `stop_times.txt`
- `calendar.txt`
- `calendar_dates.txt`
- `shapes.txt`

It then checks those records against GTFS rules and returns a list of
validation notices. It uses only the standard library.

## Installation

```
pip install ggtfs
```

## Loading a file

```python
from ggtfs.loading import GtfsCsvReader, load_routes

with open("routes.txt", newline="", encoding="utf-8-sig") as f:
    reader = GtfsCsvReader(f)
    routes, errors = load_routes(reader)

for error in errors:
    print(error)
```

`GtfsCsvReader` wraps any iterable of text lines. It skips blank lines.
Every record must have as many fields as the first record, which is the header row.

The loaders are:

- `load_agencies`
- `load_routes`
- `load_stops`
- `load_trips`
- `load_stop_times`
- `load_calendar`
- `load_calendar_dates`
- `load_shapes`

Each loader returns a tuple: the list of records and a list of errors. Each
error message starts with the line it came from, for example `line 3: ...`.

The reader takes two options:

- `fail_on_header_errors` (default `True`): if the header row has problems,
  such as a duplicate column name, return no records and only the header
  errors.
- `skip_rows_with_errors` (default `True`): leave out a record that cannot
  be parsed or has the wrong number of fields. When this is `False`, the
  error is still reported, but a record is built anyway:
  - from the row's fields, for a wrong field count;
  - with every field `None`, for a row that cannot be parsed.

Every field is kept as the text found in the file:

- A column that is missing gives `None`.
- A column that is present but empty gives `""`.
- Columns the loader does not know are ignored.
- In `stops.txt`, a `municipality_id` column is stored in `Stop.extensions`
  as a `StopExtensions` value.

The lower-level helpers are in `ggtfs.parsing`:

- `get_header_index(rows, valid_header_list)` maps header names to column
  positions. Unknown headers map to `-1`.
- `get_row_value_for_header_name(row, headers, header_name)` returns the
  value of a named column in a row.

The same module holds the file name constants, such as `FILE_NAME_ROUTES`.

## Validating

```python
from ggtfs.agency import validate_agencies
from ggtfs.route import validate_routes

notices = validate_agencies(agencies) + validate_routes(routes, agencies)
for notice in notices:
    print(notice.severity.name, notice.as_text())
```

Every notice is a frozen dataclass from `ggtfs.notices`. It has:

- a `code`, such as `invalid_url` or `foreign_key_violation`;
- a `severity`, which is a `ValidationNoticeSeverity`: `INFO`,
  `RECOMMENDATION` or `VIOLATION`;
- an `as_text()` method that gives a one-line description.

Each module has a per-record validator and a per-file validator:

| Module           | One record                                           | Whole file                                                 |
|------------------|------------------------------------------------------|------------------------------------------------------------|
| `ggtfs.agency`   | `validate_agency`                                    | `validate_agencies`                                        |
| `ggtfs.calendar` | `validate_calendar_item`, `validate_calendar_date`   | `validate_calendar_items`, `validate_calendar_dates`       |
| `ggtfs.route`    | `validate_route`                                     | `validate_routes`                                          |
| `ggtfs.stop`     | `validate_stop`                                      | `validate_stops`                                           |
| `ggtfs.stoptime` | `validate_stop_time`                                 | `validate_stop_times`                                      |
| `ggtfs.trip`     | `validate_trip`                                      | `validate_trips`                                           |
| `ggtfs.shape`    | `validate_shape`                                     | `validate_shapes`                                          |

`None` entries in a list are skipped.

The per-file validators also check rules across records. These include:

- unique ids;
- an agency id when there are several agencies;
- at least two points per shape.

### References between files

Some validators take related tables and check references into them:

- `validate_routes(routes, agencies)` checks each route's `agency_id`.
  Pass `None` for `agencies` to skip this check.
- `validate_trips(trips, routes, calendar_items, shapes)` checks each
  trip's route, service and shape. Pass `None` for any related table to
  skip that check.
- `validate_calendar_dates(calendar_dates, calendar_items)` checks each
  date's `service_id`. Pass `None` for `calendar_items` to skip this check.
- `validate_stop_times(stop_times, stops)` checks each stop time's
  `stop_id`. This check is always made. With `stops` set to `None`, or an
  empty list, every stop time is reported as a foreign key violation.

### Single fields

Single values are checked by `ggtfs.fields.validate_field`, with a
`FieldType` such as `FieldType.TIME` or `FieldType.COLOR`.

The same module provides two helpers:

- `string_is_nil_or_empty`
- `is_location_type_valid`

## Other records

`ggtfs.models` defines dataclasses for these records:

- `FareAttributes`
- `FareRule`
- `Frequency`
- `Level`
- `Pathway`
- `Transfer`

## What it does not do

- There are no loaders or validators for fares, frequencies, levels,
  pathways or transfers. Their dataclasses are defined but never filled
  from files.
- It does not open feed directories or zip archives. You open each file
  yourself and pass it to a loader.
- There is no command-line program.

## Running the tests

```
pip install -e ".[test]"
pytest
```