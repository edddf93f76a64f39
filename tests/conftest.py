"""Pytest configuration and shared fixtures."""

from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from gtfs_ingest.ingestion.sources import InMemoryTable

Rows = list[list[str]]


class RecordingSink:
    """Sink that records every call as ``(method, record)`` in arrival order."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, Any]] = []

    def __getattr__(self, name: str) -> Callable[[Any], None]:
        if not name.startswith("add_"):
            raise AttributeError(name)
        return lambda record: self.calls.append((name, record))

    def methods(self) -> list[str]:
        return [method for method, _ in self.calls]

    def records(self, method: str) -> list[Any]:
        return [record for m, record in self.calls if m == method]


@pytest.fixture
def sink() -> RecordingSink:
    """Return an empty recording sink."""
    return RecordingSink()


@pytest.fixture
def minimal_tables() -> dict[str, Rows]:
    """Rows of a minimal valid feed with consistent references."""
    return {
        "agency": [
            ["agency_id", "agency_name", "agency_url", "agency_timezone"],
            ["A1", "Metro", "https://metro.example", "Europe/Brussels"],
        ],
        "stops": [
            ["stop_id", "stop_name", "stop_lat", "stop_lon"],
            ["S1", "Central", "50.8467", "4.3525"],
            ["S2", "North", "50.8600", "4.3610"],
        ],
        "routes": [
            [
                "route_id",
                "agency_id",
                "route_short_name",
                "route_long_name",
                "route_type",
                "route_color",
            ],
            ["R1", "A1", "1", "Line One", "3", "#FF0000"],
        ],
        "trips": [
            ["route_id", "service_id", "trip_id"],
            ["R1", "WK", "T1"],
            ["R1", "WK", "T2"],
        ],
        "stop_times": [
            ["trip_id", "arrival_time", "departure_time", "stop_id", "stop_sequence"],
            ["T1", "08:00:00", "08:00:00", "S1", "1"],
            ["T1", "08:05:00", "08:05:00", "S2", "2"],
            ["T2", "09:00:00", "09:00:00", "S1", "1"],
        ],
        "calendar": [
            [
                "service_id",
                "monday",
                "tuesday",
                "wednesday",
                "thursday",
                "friday",
                "saturday",
                "sunday",
                "start_date",
                "end_date",
            ],
            ["WK", "1", "1", "1", "1", "1", "0", "0", "20240101", "20241231"],
        ],
    }


@pytest.fixture
def minimal_feed(minimal_tables: dict[str, Rows]) -> list[InMemoryTable]:
    """
    Minimal feed with dependents listed before their prerequisites.

    Listing stop_times first forces the scheduler to reorder.
    """
    order = ["stop_times", "trips", "routes", "calendar", "stops", "agency"]
    return [InMemoryTable(name, minimal_tables[name]) for name in order]


def write_feed(directory: Path, tables: dict[str, Rows]) -> Path:
    """Write tables as comma-separated ``<name>.txt`` files."""
    directory.mkdir(parents=True, exist_ok=True)
    for name, rows in tables.items():
        lines = [",".join(row) for row in rows]
        (directory / f"{name}.txt").write_text("\n".join(lines) + "\n", encoding="utf-8")
    return directory


@pytest.fixture
def feed_dir(tmp_path: Path, minimal_tables: dict[str, Rows]) -> Path:
    """Directory holding the minimal feed as GTFS text files."""
    return write_feed(tmp_path / "feed", minimal_tables)
