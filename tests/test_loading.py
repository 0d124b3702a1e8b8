import io

from ggtfs.agency import Agency
from ggtfs.loading import (
    GtfsCsvReader,
    load_agencies,
    load_calendar,
    load_calendar_dates,
    load_routes,
    load_shapes,
    load_stop_times,
    load_stops,
    load_trips,
)


def reader_for(text, **kwargs):
    return GtfsCsvReader(io.StringIO(text), **kwargs)


def test_load_agencies_reads_rows_with_line_numbers():
    text = (
        "agency_id,agency_name,agency_url,agency_timezone\n"
        "1,ACME,https://acme.inc,Europe/Helsinki\n"
        "2,ACME2,https://acme2.inc,Europe/Helsinki\n"
    )
    agencies, errors = load_agencies(reader_for(text))
    assert errors == []
    assert agencies == [
        Agency(id="1", name="ACME", url="https://acme.inc", timezone="Europe/Helsinki", line_number=2),
        Agency(id="2", name="ACME2", url="https://acme2.inc", timezone="Europe/Helsinki", line_number=3),
    ]


def test_empty_input_gives_nothing():
    agencies, errors = load_agencies(reader_for(""))
    assert agencies == []
    assert errors == []


def test_duplicate_header_fails_by_default():
    text = "agency_id,agency_id\n1,2\n"
    agencies, errors = load_agencies(reader_for(text))
    assert agencies == []
    assert [str(e) for e in errors] == ["line 1: duplicate header name: agency_id"]


def test_duplicate_header_tolerated_when_asked():
    text = "agency_id,agency_name,agency_id\n1,ACME,2\n"
    agencies, errors = load_agencies(reader_for(text, fail_on_header_errors=False))
    assert len(errors) == 1
    assert len(agencies) == 1
    assert agencies[0].id == "1"
    assert agencies[0].name == "ACME"


def test_wrong_field_count_row_is_skipped_by_default():
    text = "agency_id,agency_name\n1,ACME\n2\n3,ACME3\n"
    agencies, errors = load_agencies(reader_for(text))
    assert [a.id for a in agencies] == ["1", "3"]
    assert [a.line_number for a in agencies] == [2, 4]
    assert len(errors) == 1
    assert str(errors[0]).startswith("line 3: ")
    assert "wrong number of fields" in str(errors[0])


def test_wrong_field_count_row_kept_when_not_skipping():
    text = "agency_id,agency_name\n1,ACME\n2\n"
    agencies, errors = load_agencies(reader_for(text, skip_rows_with_errors=False))
    assert len(errors) == 1
    assert [a.id for a in agencies] == ["1", "2"]
    assert agencies[1].name is None


def test_parse_error_row_without_skipping_yields_empty_entity():
    text = 'agency_id,agency_name\n1,"AC"ME\n2,ACME2\n'
    agencies, errors = load_agencies(reader_for(text, skip_rows_with_errors=False))
    assert len(errors) == 1
    assert str(errors[0]).startswith("line 2: ")
    assert agencies[0] == Agency(line_number=2)
    assert agencies[1].id == "2"


def test_parse_error_row_skipped_by_default():
    text = 'agency_id,agency_name\n1,"AC"ME\n2,ACME2\n'
    agencies, errors = load_agencies(reader_for(text))
    assert len(errors) == 1
    assert [(a.id, a.line_number) for a in agencies] == [("2", 3)]


def test_blank_lines_are_ignored():
    text = "agency_id,agency_name\n\n1,ACME\n\n"
    agencies, errors = load_agencies(reader_for(text))
    assert errors == []
    assert [(a.id, a.line_number) for a in agencies] == [("1", 2)]


def test_unknown_headers_are_ignored():
    text = "agency_id,something_else\n1,x\n"
    agencies, errors = load_agencies(reader_for(text))
    assert errors == []
    assert agencies == [Agency(id="1", line_number=2)]


def test_load_routes():
    text = "route_id,agency_id,route_short_name,route_type\n1,Agency,route1,3\n"
    routes, errors = load_routes(reader_for(text))
    assert errors == []
    assert (routes[0].id, routes[0].agency_id, routes[0].short_name, routes[0].type) == (
        "1", "Agency", "route1", "3",
    )


def test_load_stops_with_municipality_extension():
    text = "stop_id,stop_name,municipality_id\n0001,Place 0001,837\n"
    stops, errors = load_stops(reader_for(text))
    assert errors == []
    assert stops[0].id == "0001"
    assert stops[0].name == "Place 0001"
    assert stops[0].extensions.municipality_id == "837"


def test_load_trips():
    text = "route_id,service_id,trip_id,shape_id\nroute id,service id,trip id,shape id\n"
    trips, errors = load_trips(reader_for(text))
    assert errors == []
    assert (trips[0].route_id, trips[0].service_id, trips[0].id, trips[0].shape_id) == (
        "route id", "service id", "trip id", "shape id",
    )


def test_load_stop_times():
    text = "trip_id,arrival_time,departure_time,stop_id,stop_sequence\n1,00:10:00,00:11:00,0001,1\n"
    stop_times, errors = load_stop_times(reader_for(text))
    assert errors == []
    st = stop_times[0]
    assert (st.trip_id, st.arrival_time, st.departure_time, st.stop_id, st.stop_sequence) == (
        "1", "00:10:00", "00:11:00", "0001", "1",
    )
    assert st.line_number == 2


def test_load_calendar():
    text = (
        "service_id,monday,tuesday,wednesday,thursday,friday,saturday,sunday,start_date,end_date\n"
        "111,1,1,1,1,1,0,0,20200101,20200102\n"
    )
    items, errors = load_calendar(reader_for(text))
    assert errors == []
    assert items[0].service_id == "111"
    assert items[0].saturday == "0"
    assert items[0].end_date == "20200102"


def test_load_calendar_dates():
    text = "service_id,date,exception_type\n111,20200101,1\n111,20201201,2\n"
    dates, errors = load_calendar_dates(reader_for(text))
    assert errors == []
    assert [(d.date, d.exception_type, d.line_number) for d in dates] == [
        ("20200101", "1", 2),
        ("20201201", "2", 3),
    ]


def test_load_shapes():
    text = "shape_id,shape_pt_lat,shape_pt_lon,shape_pt_sequence\n1,1.111,1.111,1\n1,2.111,2.111,2\n"
    shapes, errors = load_shapes(reader_for(text))
    assert errors == []
    assert [s.pt_sequence for s in shapes] == ["1", "2"]
    assert all(s.id == "1" for s in shapes)


def test_reader_accepts_list_of_lines():
    reader = GtfsCsvReader(["agency_id,agency_name\n", "1,ACME\n"])
    agencies, errors = load_agencies(reader)
    assert errors == []
    assert agencies[0].name == "ACME"