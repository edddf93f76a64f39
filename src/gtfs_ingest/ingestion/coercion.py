"""
Field coercion functions.

Every coercion takes ``(table_name, field_name, value)`` and returns the
typed value, ``None`` for an absent optional value, or raises
FieldParseError. Table and field names are only used for error reporting.
"""

import math
import re
from collections.abc import Callable
from enum import Enum
from typing import Any, TypeVar

from gtfs_ingest.ingestion.errors import FieldParseError
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

Coercion = Callable[[str, str, str], Any]

E = TypeVar("E", bound=Enum)

UINT_MAX = 0xFFFFFFFF

_UINT_PATTERN = re.compile(r"\+?[0-9]+")
_DOUBLE_PATTERN = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_COLOR_PATTERN = re.compile(r"#[0-9A-Fa-f]{6}")


def _is_blank(value: str) -> bool:
    return not value or value.isspace()


def parse_string(table_name: str, field_name: str, value: str) -> str:
    """Return the value unchanged. An empty string is a value, not absence."""
    return value


def parse_optional_string(table_name: str, field_name: str, value: str) -> str | None:
    """Return the value, or None when it is empty or whitespace only."""
    if _is_blank(value):
        return None
    return value


def parse_bool(table_name: str, field_name: str, value: str) -> bool | None:
    """Parse a ``0``/``1`` flag."""
    if _is_blank(value):
        return None
    if value == "0":
        return False
    if value == "1":
        return True
    raise FieldParseError(table_name, field_name, value)


def parse_uint(table_name: str, field_name: str, value: str) -> int | None:
    """Parse a non-negative integer that fits in 32 bits."""
    if _is_blank(value):
        return None
    text = value.strip()
    if not _UINT_PATTERN.fullmatch(text):
        raise FieldParseError(table_name, field_name, value)
    result = int(text)
    if result > UINT_MAX:
        cause = OverflowError(f"value exceeds {UINT_MAX}")
        raise FieldParseError(table_name, field_name, value, cause)
    return result


def parse_double(table_name: str, field_name: str, value: str) -> float | None:
    """Parse a locale-invariant decimal, plain or in scientific notation."""
    if _is_blank(value):
        return None
    text = value.strip()
    if not _DOUBLE_PATTERN.fullmatch(text):
        raise FieldParseError(table_name, field_name, value)
    result = float(text)
    if not math.isfinite(result):
        cause = OverflowError("value out of double range")
        raise FieldParseError(table_name, field_name, value, cause)
    return result


def parse_color(table_name: str, field_name: str, value: str) -> int | None:
    """
    Parse a ``#RRGGBB`` color into a packed ARGB integer.

    Channels are hexadecimal and alpha is always 255, so ``#000000``
    becomes ``0xFF000000``.
    """
    if _is_blank(value):
        return None
    if len(value) != 7:
        raise FieldParseError(table_name, field_name, value)
    if not _COLOR_PATTERN.fullmatch(value):
        cause = ValueError("expected a color of the form #RRGGBB")
        raise FieldParseError(table_name, field_name, value, cause)

    alpha = 255
    red = int(value[1:3], 16)
    green = int(value[3:5], 16)
    blue = int(value[5:7], 16)
    for channel, component in (
        ("alpha", alpha),
        ("red", red),
        ("green", green),
        ("blue", blue),
    ):
        if not 0 <= component <= 255:
            cause = ValueError(f"{channel} has to be in the range 0-255")
            raise FieldParseError(table_name, field_name, value, cause)

    return (alpha << 24) | (red << 16) | (green << 8) | blue


def enum_parser(enum_type: type[E], *, nullable: bool) -> Callable[[str, str, str], E | None]:
    """
    Build a coercion that maps literal codes onto ``enum_type`` members.

    Nullable enumerations read an empty value as None; mandatory ones
    reject it like any other unknown code.
    """

    def parse(table_name: str, field_name: str, value: str) -> E | None:
        if nullable and _is_blank(value):
            return None
        try:
            return enum_type(value)
        except ValueError as e:
            raise FieldParseError(table_name, field_name, value, e) from e

    parse.__name__ = f"parse_{enum_type.__name__}"
    return parse


def required(coercion: Coercion) -> Coercion:
    """Wrap a coercion so that an absent result is a parse error."""

    def parse(table_name: str, field_name: str, value: str) -> Any:
        result = coercion(table_name, field_name, value)
        if result is None:
            cause = ValueError("a value is required")
            raise FieldParseError(table_name, field_name, value, cause)
        return result

    parse.__name__ = f"required_{getattr(coercion, '__name__', 'coercion')}"
    return parse


parse_route_type = enum_parser(RouteType, nullable=False)
parse_exception_type = enum_parser(ExceptionType, nullable=False)
parse_payment_method = enum_parser(PaymentMethodType, nullable=False)
parse_accessibility_type = enum_parser(WheelchairAccessibilityType, nullable=True)
parse_drop_off_type = enum_parser(DropOffType, nullable=True)
parse_pickup_type = enum_parser(PickupType, nullable=True)
parse_location_type = enum_parser(LocationType, nullable=True)
parse_direction_type = enum_parser(DirectionType, nullable=True)
parse_transfer_type = enum_parser(TransferType, nullable=True)
