"""
GTFS enumerations.

Each member's value is the literal code string used in the feed, so
decoding is an exact lookup: ``RouteType("3") is RouteType.BUS``.
"""

from enum import Enum


class RouteType(str, Enum):
    """Transit mode of a route."""

    TRAM = "0"  # Tram, streetcar, light rail
    SUBWAY_METRO = "1"
    RAIL = "2"  # Intercity or long-distance rail
    BUS = "3"
    FERRY = "4"
    CABLE_CAR = "5"  # Street-level, cable beneath the car
    GONDOLA = "6"  # Aerial, car suspended from the cable
    FUNICULAR = "7"


class ExceptionType(str, Enum):
    """Service change for a calendar date."""

    ADDED = "1"
    REMOVED = "2"


class PaymentMethodType(str, Enum):
    """When a fare is paid."""

    ON_BOARD = "0"
    BEFORE_BOARDING = "1"


class WheelchairAccessibilityType(str, Enum):
    """Wheelchair accessibility of a trip or stop."""

    NO_INFORMATION = "0"
    SOME_ACCESSIBILITY = "1"
    NO_ACCESSIBILITY = "2"


class PickupType(str, Enum):
    """Pickup arrangement at a stop time."""

    REGULAR = "0"
    NO_PICKUP = "1"
    PHONE_FOR_PICKUP = "2"
    DRIVER_FOR_PICKUP = "3"


class DropOffType(str, Enum):
    """Drop-off arrangement at a stop time."""

    REGULAR = "0"
    NO_DROP_OFF = "1"
    PHONE_FOR_DROP_OFF = "2"
    DRIVER_FOR_DROP_OFF = "3"


class LocationType(str, Enum):
    """Kind of location described by a stop row."""

    STOP = "0"
    STATION = "1"


class DirectionType(str, Enum):
    """Travel direction of a trip."""

    ONE_DIRECTION = "0"  # e.g. outbound
    OPPOSITE_DIRECTION = "1"  # e.g. inbound


class TransferType(str, Enum):
    """Connection type between two stops."""

    RECOMMENDED = "0"
    TIMED = "1"
    MINIMUM_TIME = "2"
    NOT_POSSIBLE = "3"
