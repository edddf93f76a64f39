"""
Data contracts for decoded GTFS feeds.

Enumerations and record types are what the decoders produce; the Pandera
frame schemas validate feed tables exported as DataFrames.
"""

from gtfs_ingest.schemas.enumerations import (
    DirectionType,
    DropOffType,
    ExceptionType,
    LocationType,
    PaymentMethodType,
    PickupType,
    RouteType,
    TransferType,
    WheelchairAccessibilityType,
)
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

__all__ = [
    "FRAME_SCHEMAS",
    "Agency",
    "Calendar",
    "CalendarDate",
    "DirectionType",
    "DropOffType",
    "ExceptionType",
    "FareAttribute",
    "FareRule",
    "FeedInfo",
    "Frequency",
    "LocationType",
    "PaymentMethodType",
    "PickupType",
    "Route",
    "RouteType",
    "Shape",
    "Stop",
    "StopTime",
    "Transfer",
    "TransferType",
    "Trip",
    "WheelchairAccessibilityType",
]
