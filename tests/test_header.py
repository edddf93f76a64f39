"""Tests for header lookup and required-column checks."""

import pytest

from gtfs_ingest.ingestion.errors import MissingRequiredField
from gtfs_ingest.ingestion.header import Header, check_required_fields


class TestHeader:
    """Tests for Header."""

    def test_lookup(self) -> None:
        header = Header.from_row("stops", ["stop_id", "stop_name", "stop_lat"])
        assert header.has_column("stop_name")
        assert header.index_of("stop_lat") == 2
        assert header.name_at(0) == "stop_id"
        assert len(header) == 3

    def test_absent_lookups(self) -> None:
        header = Header.from_row("stops", ["stop_id"])
        assert not header.has_column("stop_name")
        assert header.index_of("stop_name") is None
        assert header.name_at(1) is None
        assert header.name_at(-1) is None

    def test_column_names_are_case_sensitive(self) -> None:
        header = Header.from_row("stops", ["Stop_ID"])
        assert not header.has_column("stop_id")
        assert header.index_of("Stop_ID") == 0

    def test_duplicate_names_return_first(self) -> None:
        header = Header.from_row("agency", ["agency_name", "agency_id", "agency_name"])
        assert header.index_of("agency_name") == 0
        assert header.name_at(2) == "agency_name"

    def test_is_immutable(self) -> None:
        row = ["stop_id"]
        header = Header.from_row("stops", row)
        row.append("stop_name")
        assert header.columns == ("stop_id",)


class TestCheckRequiredFields:
    """Tests for check_required_fields."""

    def test_all_present(self) -> None:
        header = Header.from_row("trips", ["trip_id", "route_id", "service_id"])
        check_required_fields(header, "trips", ("route_id", "trip_id"))

    def test_reports_first_missing_in_declared_order(self) -> None:
        header = Header.from_row("stops", ["stop_id"])
        with pytest.raises(MissingRequiredField) as exc_info:
            check_required_fields(header, "stops", ("stop_id", "stop_lon", "stop_lat"))
        assert exc_info.value.table_name == "stops"
        assert exc_info.value.field_name == "stop_lon"

    def test_repeated_names_are_harmless(self) -> None:
        header = Header.from_row("stop_times", ["trip_id", "stop_id"])
        check_required_fields(header, "stop_times", ("stop_id", "trip_id", "stop_id", "stop_id"))

    def test_match_is_case_sensitive(self) -> None:
        header = Header.from_row("trips", ["Trip_Id"])
        with pytest.raises(MissingRequiredField, match="trip_id"):
            check_required_fields(header, "trips", ("trip_id",))
