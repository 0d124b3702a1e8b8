"""Loading and validation of GTFS static transit feed files."""

__version__ = "0.1.0"