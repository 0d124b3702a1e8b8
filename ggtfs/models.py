"""Records of the GTFS files that are held as typed values."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass
class FareAttributes:
    """One row of fare_attributes.txt."""

    id: str
    price: float
    currency_type: str
    payment_method: int
    transfers: int
    agency_id: Optional[str] = None
    transfer_duration: Optional[int] = None
    line_number: int = 0


@dataclass
class FareRule:
    """One row of fare_rules.txt."""

    id: str
    route_id: Optional[str] = None
    origin_id: Optional[str] = None
    destination_id: Optional[str] = None
    contains_id: Optional[str] = None
    line_number: int = 0


@dataclass
class Frequency:
    """One row of frequencies.txt."""

    trip_id: str
    start_time: str
    end_time: str
    headway_secs: int
    exact_times: Optional[int] = None
    line_number: int = 0


@dataclass
class Level:
    """One row of levels.txt."""

    id: str
    level_index: float
    level_name: str
    line_number: int = 0


@dataclass
class Pathway:
    """One row of pathways.txt."""

    id: str
    from_stop_id: str
    to_stop_id: str
    pathway_mode: int
    is_bidirectional: int
    length: float
    traversal_time: int
    stair_count: int
    max_slope: float
    min_width: float
    signposted_as: str
    reverse_signposted_as: str
    line_number: int = 0


@dataclass
class Transfer:
    """One row of transfers.txt."""

    from_stop_id: str
    to_stop_id: str
    transfer_type: int
    min_transfer_time: int
    line_number: int = 0