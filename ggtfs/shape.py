"""Shape points of shapes.txt."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Iterable, Mapping, Optional, Sequence

from ggtfs.fields import FieldType, validate_field
from ggtfs.notices import TooFewShapePointsNotice, ValidationNotice
from ggtfs.parsing import FILE_NAME_SHAPES, get_row_value_for_header_name


@dataclass
class Shape:
    """One point of a shape; every field keeps its raw text."""

    id: Optional[str] = None  # shape_id (required)
    pt_lat: Optional[str] = None  # shape_pt_lat (required)
    pt_lon: Optional[str] = None  # shape_pt_lon (required)
    pt_sequence: Optional[str] = None  # shape_pt_sequence (required)
    dist_traveled: Optional[str] = None  # shape_dist_traveled (optional)
    line_number: int = 0


_COLUMNS = {
    "shape_id": "id",
    "shape_pt_lat": "pt_lat",
    "shape_pt_lon": "pt_lon",
    "shape_pt_sequence": "pt_sequence",
    "shape_dist_traveled": "dist_traveled",
}


def create_shape(
    row: Optional[Sequence[str]], headers: Mapping[str, int], line_number: int
) -> Shape:
    """Build a shape point from a CSV row and its header index."""
    values = {
        attribute: get_row_value_for_header_name(row, headers, header)
        for header, attribute in _COLUMNS.items()
        if header in headers
    }
    return Shape(line_number=line_number, **values)


def validate_shape(shape: Shape) -> list[ValidationNotice]:
    """Check the fields of one shape point."""
    fields = (
        (FieldType.ID, "shape_id", shape.id, True),
        (FieldType.LATITUDE, "shape_pt_lat", shape.pt_lat, True),
        (FieldType.LONGITUDE, "shape_pt_lon", shape.pt_lon, True),
        (FieldType.INTEGER, "shape_pt_sequence", shape.pt_sequence, True),
        (FieldType.FLOAT, "shape_dist_traveled", shape.dist_traveled, False),
    )
    return [
        notice
        for field_type, name, value, required in fields
        for notice in validate_field(
            field_type, name, value, required, FILE_NAME_SHAPES, shape.line_number
        )
    ]


def validate_shapes(shapes: Optional[Iterable[Optional[Shape]]]) -> list[ValidationNotice]:
    """Check every shape point and that each shape has at least two points."""
    results: list[ValidationNotice] = []
    point_counts: Counter[str] = Counter()

    for shape in shapes or ():
        if shape is None:
            continue
        results.extend(validate_shape(shape))
        if shape.id is not None:
            point_counts[shape.id] += 1

    results.extend(
        TooFewShapePointsNotice(file_name=FILE_NAME_SHAPES, shape_id=shape_id)
        for shape_id, count in point_counts.items()
        if count < 2
    )
    return results