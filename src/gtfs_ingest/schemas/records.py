"""
Decoded record types, one per GTFS entity kind.

Records are frozen once built. Every field defaults to ``None`` so that a
short row (fewer values than header columns) still yields a record; for
fields backed by a required column ``None`` therefore only occurs when the
row itself omitted the value. ``None`` always means "absent": an empty
string or zero is a real value.
"""

from dataclasses import dataclass

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


@dataclass(frozen=True)
class Agency:
    """A transit agency (agency.txt)."""

    id: str | None = None
    name: str | None = None
    url: str | None = None
    timezone: str | None = None
    language_code: str | None = None
    phone: str | None = None


@dataclass(frozen=True)
class Stop:
    """A stop or station (stops.txt)."""

    id: str | None = None
    code: str | None = None
    name: str | None = None
    description: str | None = None
    latitude: float | None = None
    longitude: float | None = None
    zone: str | None = None
    url: str | None = None
    location_type: LocationType | None = None
    parent_station: str | None = None
    timezone: str | None = None
    wheelchair_boarding: WheelchairAccessibilityType | None = None


@dataclass(frozen=True)
class Route:
    """A route (routes.txt). Colors are packed ARGB integers."""

    id: str | None = None
    agency_id: str | None = None
    short_name: str | None = None
    long_name: str | None = None
    description: str | None = None
    type: RouteType | None = None
    url: str | None = None
    color: int | None = None
    text_color: int | None = None


@dataclass(frozen=True)
class Trip:
    """A trip (trips.txt)."""

    id: str | None = None
    route_id: str | None = None
    service_id: str | None = None
    headsign: str | None = None
    short_name: str | None = None
    direction: DirectionType | None = None
    block_id: str | None = None
    shape_id: str | None = None
    accessibility_type: WheelchairAccessibilityType | None = None


@dataclass(frozen=True)
class StopTime:
    """A scheduled stop of a trip (stop_times.txt)."""

    trip_id: str | None = None
    arrival_time: str | None = None
    departure_time: str | None = None
    stop_id: str | None = None
    stop_sequence: int | None = None
    stop_headsign: str | None = None
    pickup_type: PickupType | None = None
    drop_off_type: DropOffType | None = None
    shape_dist_traveled: str | None = None


@dataclass(frozen=True)
class Calendar:
    """Weekly service pattern (calendar.txt). Dates stay as YYYYMMDD text."""

    service_id: str | None = None
    monday: bool | None = None
    tuesday: bool | None = None
    wednesday: bool | None = None
    thursday: bool | None = None
    friday: bool | None = None
    saturday: bool | None = None
    sunday: bool | None = None
    start_date: str | None = None
    end_date: str | None = None


@dataclass(frozen=True)
class CalendarDate:
    """A single-date service exception (calendar_dates.txt)."""

    service_id: str | None = None
    date: str | None = None
    exception_type: ExceptionType | None = None


@dataclass(frozen=True)
class FareAttribute:
    """A fare class (fare_attributes.txt)."""

    fare_id: str | None = None
    price: str | None = None
    currency_type: str | None = None
    payment_method: PaymentMethodType | None = None
    transfers: int | None = None
    transfer_duration: str | None = None


@dataclass(frozen=True)
class FareRule:
    """Applicability of a fare (fare_rules.txt)."""

    fare_id: str | None = None
    route_id: str | None = None
    origin_id: str | None = None
    destination_id: str | None = None
    contains_id: str | None = None


@dataclass(frozen=True)
class Shape:
    """One point of a shape polyline (shapes.txt)."""

    id: str | None = None
    latitude: float | None = None
    longitude: float | None = None
    sequence: int | None = None
    distance_traveled: float | None = None


@dataclass(frozen=True)
class Frequency:
    """Headway-based service of a trip (frequencies.txt)."""

    trip_id: str | None = None
    start_time: str | None = None
    end_time: str | None = None
    headway_secs: str | None = None
    exact_times: bool | None = None


@dataclass(frozen=True)
class FeedInfo:
    """Feed publisher metadata (feed_info.txt)."""

    publisher_name: str | None = None
    publisher_url: str | None = None
    language: str | None = None
    start_date: str | None = None
    end_date: str | None = None
    version: str | None = None


@dataclass(frozen=True)
class Transfer:
    """A transfer rule between two stops (transfers.txt)."""

    from_stop_id: str | None = None
    to_stop_id: str | None = None
    transfer_type: TransferType | None = None
    min_transfer_time: int | None = None
