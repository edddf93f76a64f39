"""Protocols for the collaborators the ingestion core talks to."""

from collections.abc import Iterator
from typing import Protocol, runtime_checkable

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


@runtime_checkable
class SourceTable(Protocol):
    """
    A named table whose iteration yields tokenized rows.

    The first row is the header. Iteration is forward-only; a table with
    no rows at all is valid.
    """

    name: str

    def __iter__(self) -> Iterator[list[str]]: ...


class FeedSink(Protocol):
    """Receives decoded records, one call per record, in row order."""

    def add_agency(self, agency: Agency) -> None: ...

    def add_stop(self, stop: Stop) -> None: ...

    def add_route(self, route: Route) -> None: ...

    def add_trip(self, trip: Trip) -> None: ...

    def add_stop_time(self, stop_time: StopTime) -> None: ...

    def add_calendar(self, calendar: Calendar) -> None: ...

    def add_calendar_date(self, calendar_date: CalendarDate) -> None: ...

    def add_fare_attribute(self, fare_attribute: FareAttribute) -> None: ...

    def add_fare_rule(self, fare_rule: FareRule) -> None: ...

    def add_shape(self, shape: Shape) -> None: ...

    def add_frequency(self, frequency: Frequency) -> None: ...

    def add_feed_info(self, feed_info: FeedInfo) -> None: ...

    def add_transfer(self, transfer: Transfer) -> None: ...
