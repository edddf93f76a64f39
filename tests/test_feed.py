"""Tests for the in-memory feed sink and its DataFrame export."""

from dataclasses import fields

import pandas as pd
import pandera as pa
import pytest

from gtfs_ingest.feed import RECORD_TYPES, GTFSFeed
from gtfs_ingest.ingestion.engine import run_ingestion
from gtfs_ingest.ingestion.sources import InMemoryTable
from gtfs_ingest.schemas.enumerations import LocationType, RouteType
from gtfs_ingest.schemas.frames import FRAME_SCHEMAS
from gtfs_ingest.schemas.records import FareRule, Route, Stop


@pytest.fixture
def feed(minimal_feed: list[InMemoryTable]) -> GTFSFeed:
    """Feed populated from the minimal feed tables."""
    return run_ingestion(minimal_feed).sink


class TestGTFSFeed:
    """Tests for record accumulation."""

    def test_counts(self, feed: GTFSFeed) -> None:
        assert feed.counts() == {
            "agency": 1,
            "stops": 2,
            "routes": 1,
            "trips": 2,
            "stop_times": 3,
            "calendar": 1,
        }

    def test_keeps_duplicates(self) -> None:
        feed = GTFSFeed()
        feed.add_stop(Stop(id="S1"))
        feed.add_stop(Stop(id="S1"))
        assert len(feed.records("stops")) == 2

    def test_records_returns_copy(self, feed: GTFSFeed) -> None:
        feed.records("stops").clear()
        assert len(feed.records("stops")) == 2

    def test_unknown_table(self) -> None:
        with pytest.raises(KeyError, match="Unknown table"):
            GTFSFeed().records("levels")


class TestToFrame:
    """Tests for DataFrame export."""

    def test_stops_frame(self, feed: GTFSFeed) -> None:
        df = feed.to_frame("stops")
        assert list(df["id"]) == ["S1", "S2"]
        assert df["latitude"].dtype == "float64"
        assert df["location_type"].isna().all()

    def test_enumerations_export_as_codes(self) -> None:
        feed = GTFSFeed()
        feed.add_route(Route(id="R1", type=RouteType.FERRY, color=0xFF00FF00))
        feed.add_stop(Stop(id="S1", latitude=1.0, longitude=2.0, location_type=LocationType.STATION))
        routes = feed.to_frame("routes")
        assert routes.loc[0, "type"] == "4"
        assert routes.loc[0, "color"] == 0xFF00FF00
        assert feed.to_frame("stops").loc[0, "location_type"] == "1"

    def test_calendar_flags(self, feed: GTFSFeed) -> None:
        df = feed.to_frame("calendar")
        assert bool(df.loc[0, "monday"]) is True
        assert bool(df.loc[0, "sunday"]) is False

    def test_invalid_coordinates_fail_validation(self) -> None:
        feed = GTFSFeed()
        feed.add_stop(Stop(id="S1", name="Nowhere", latitude=100.0, longitude=4.3))
        with pytest.raises(pa.errors.SchemaError):
            feed.to_frame("stops")
        assert len(feed.to_frame("stops", validate=False)) == 1

    def test_table_without_schema(self) -> None:
        feed = GTFSFeed()
        feed.add_fare_rule(FareRule(fare_id="F1", route_id="R1"))
        df = feed.to_frame("fare_rules")
        assert list(df.columns) == [
            "fare_id",
            "route_id",
            "origin_id",
            "destination_id",
            "contains_id",
        ]

    def test_empty_table(self) -> None:
        df = GTFSFeed().to_frame("shapes")
        assert isinstance(df, pd.DataFrame)
        assert df.empty
        assert "sequence" in df.columns

    @pytest.mark.parametrize("table", sorted(FRAME_SCHEMAS))
    def test_every_validated_table_exports_empty(self, table: str) -> None:
        """A feed without records still exports every validated table."""
        df = GTFSFeed().to_frame(table)
        assert df.empty
        assert list(df.columns) == [f.name for f in fields(RECORD_TYPES[table])]

    def test_missing_text_stays_missing(self) -> None:
        """Absent text values export as missing, not as the text "None"."""
        feed = GTFSFeed()
        feed.add_stop(Stop(id="S1", latitude=1.0, longitude=2.0))
        feed.add_stop(Stop(id="S2", name="Central", latitude=1.0, longitude=2.0))
        names = feed.to_frame("stops")["name"]
        assert names.isna().tolist() == [True, False]
        assert names.iloc[1] == "Central"
