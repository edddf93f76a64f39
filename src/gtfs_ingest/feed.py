"""
In-memory GTFS feed.

GTFSFeed is the reference sink: it keeps every record it is given, in
arrival order, and exports tables as validated DataFrames.
"""

from dataclasses import fields
from enum import Enum
from typing import Any

import pandas as pd

from gtfs_ingest.ingestion.entities import DEFAULT_DECODERS
from gtfs_ingest.schemas.frames import FRAME_SCHEMAS
from gtfs_ingest.schemas.records import (
    Agency,
    Calendar,
    CalendarDate,
    FareAttribute,
    FareRule,
    FeedInfo,
    Frequency,
    Route,
    Shape,
    Stop,
    StopTime,
    Transfer,
    Trip,
)
from gtfs_ingest.utils.logging import get_logger

log = get_logger(__name__)

# Table name -> record type, as declared by the decoders.
RECORD_TYPES: dict[str, type] = {
    decoder.table_name: decoder.record_type for decoder in DEFAULT_DECODERS
}


def _export_value(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    return value


class GTFSFeed:
    """
    Accumulates decoded records per table.

    No deduplication is done: two rows with the same identifier produce
    two records.
    """

    def __init__(self) -> None:
        self._records: dict[str, list[Any]] = {table: [] for table in RECORD_TYPES}

    def add_agency(self, agency: Agency) -> None:
        self._records["agency"].append(agency)

    def add_stop(self, stop: Stop) -> None:
        self._records["stops"].append(stop)

    def add_route(self, route: Route) -> None:
        self._records["routes"].append(route)

    def add_trip(self, trip: Trip) -> None:
        self._records["trips"].append(trip)

    def add_stop_time(self, stop_time: StopTime) -> None:
        self._records["stop_times"].append(stop_time)

    def add_calendar(self, calendar: Calendar) -> None:
        self._records["calendar"].append(calendar)

    def add_calendar_date(self, calendar_date: CalendarDate) -> None:
        self._records["calendar_dates"].append(calendar_date)

    def add_fare_attribute(self, fare_attribute: FareAttribute) -> None:
        self._records["fare_attributes"].append(fare_attribute)

    def add_fare_rule(self, fare_rule: FareRule) -> None:
        self._records["fare_rules"].append(fare_rule)

    def add_shape(self, shape: Shape) -> None:
        self._records["shapes"].append(shape)

    def add_frequency(self, frequency: Frequency) -> None:
        self._records["frequencies"].append(frequency)

    def add_feed_info(self, feed_info: FeedInfo) -> None:
        self._records["feed_info"].append(feed_info)

    def add_transfer(self, transfer: Transfer) -> None:
        self._records["transfers"].append(transfer)

    def records(self, table: str) -> list[Any]:
        """
        Return the records of a table, in the order they were added.

        Raises:
            KeyError: If the table is not a known GTFS table.
        """
        if table not in self._records:
            available = ", ".join(self._records)
            msg = f"Unknown table '{table}'. Available: {available}"
            raise KeyError(msg)
        return list(self._records[table])

    def counts(self) -> dict[str, int]:
        """Number of records per table, for tables holding any."""
        return {table: len(recs) for table, recs in self._records.items() if recs}

    def to_frame(self, table: str, *, validate: bool = True) -> pd.DataFrame:
        """
        Export a table as a DataFrame.

        Enumeration values are exported as their GTFS codes; absent values
        as missing.

        Args:
            table: Table name.
            validate: Validate against the table's Pandera schema, if any.

        Returns:
            One row per record, one column per record attribute.

        Raises:
            KeyError: If the table is not a known GTFS table.
            pandera.errors.SchemaError: If validation fails.
        """
        records = self.records(table)
        columns = [f.name for f in fields(RECORD_TYPES[table])]
        rows = [
            {name: _export_value(getattr(record, name)) for name in columns}
            for record in records
        ]
        df = pd.DataFrame(rows, columns=columns)

        schema = FRAME_SCHEMAS.get(table)
        if validate and schema is not None:
            df = schema.validate(df)
            log.debug("Frame validation passed", table=table, rows=len(df))
        return df
