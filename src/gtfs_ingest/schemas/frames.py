"""
Pandera schemas for feed tables exported as DataFrames.

Decoded records already passed per-field coercion; these schemas pin the
column dtypes of the exported frames and add range checks that only make
sense column-wise (coordinates, color values, enumeration codes).
"""

import pandas as pd
import pandera.pandas as pa
from pandera.typing import Series

from gtfs_ingest.schemas.enumerations import (
    DirectionType,
    DropOffType,
    LocationType,
    PickupType,
    RouteType,
    TransferType,
    WheelchairAccessibilityType,
)


def _codes(enum_type: type) -> list[str]:
    return [member.value for member in enum_type]


class AgencyFrameSchema(pa.DataFrameModel):
    """Schema for exported agencies."""

    id: Series[str] = pa.Field(
        nullable=True, coerce=True, description="Agency identifier"
    )
    name: Series[str] = pa.Field(nullable=True, coerce=True)
    url: Series[str] = pa.Field(nullable=True, coerce=True)
    timezone: Series[str] = pa.Field(nullable=True, coerce=True)

    class Config:
        """Schema configuration."""

        name = "AgencyFrameSchema"
        strict = False


class StopFrameSchema(pa.DataFrameModel):
    """Schema for exported stops."""

    id: Series[str] = pa.Field(
        nullable=True, coerce=True, description="Stop identifier"
    )
    name: Series[str] = pa.Field(nullable=True, coerce=True)
    latitude: Series[float] = pa.Field(
        ge=-90.0, le=90.0, nullable=True, coerce=True, description="WGS84 latitude"
    )
    longitude: Series[float] = pa.Field(
        ge=-180.0, le=180.0, nullable=True, coerce=True, description="WGS84 longitude"
    )
    location_type: Series[str] = pa.Field(
        isin=_codes(LocationType), nullable=True, coerce=True
    )
    wheelchair_boarding: Series[str] = pa.Field(
        isin=_codes(WheelchairAccessibilityType), nullable=True, coerce=True
    )

    class Config:
        """Schema configuration."""

        name = "StopFrameSchema"
        strict = False


class RouteFrameSchema(pa.DataFrameModel):
    """Schema for exported routes. Colors are packed ARGB integers."""

    id: Series[str] = pa.Field(
        nullable=True, coerce=True, description="Route identifier"
    )
    type: Series[str] = pa.Field(isin=_codes(RouteType), nullable=True, coerce=True)
    color: Series[pd.Int64Dtype] = pa.Field(
        ge=0, le=0xFFFFFFFF, nullable=True, coerce=True
    )
    text_color: Series[pd.Int64Dtype] = pa.Field(
        ge=0, le=0xFFFFFFFF, nullable=True, coerce=True
    )

    class Config:
        """Schema configuration."""

        name = "RouteFrameSchema"
        strict = False


class TripFrameSchema(pa.DataFrameModel):
    """Schema for exported trips."""

    id: Series[str] = pa.Field(
        nullable=True, coerce=True, description="Trip identifier"
    )
    route_id: Series[str] = pa.Field(nullable=True, coerce=True)
    service_id: Series[str] = pa.Field(nullable=True, coerce=True)
    direction: Series[str] = pa.Field(
        isin=_codes(DirectionType), nullable=True, coerce=True
    )
    accessibility_type: Series[str] = pa.Field(
        isin=_codes(WheelchairAccessibilityType), nullable=True, coerce=True
    )

    class Config:
        """Schema configuration."""

        name = "TripFrameSchema"
        strict = False


class StopTimeFrameSchema(pa.DataFrameModel):
    """Schema for exported stop times."""

    trip_id: Series[str] = pa.Field(nullable=True, coerce=True)
    stop_id: Series[str] = pa.Field(nullable=True, coerce=True)
    stop_sequence: Series[pd.Int64Dtype] = pa.Field(ge=0, nullable=True, coerce=True)
    pickup_type: Series[str] = pa.Field(
        isin=_codes(PickupType), nullable=True, coerce=True
    )
    drop_off_type: Series[str] = pa.Field(
        isin=_codes(DropOffType), nullable=True, coerce=True
    )

    class Config:
        """Schema configuration."""

        name = "StopTimeFrameSchema"
        strict = False


class CalendarFrameSchema(pa.DataFrameModel):
    """Schema for exported weekly service patterns."""

    service_id: Series[str] = pa.Field(nullable=True, coerce=True)
    monday: Series[pd.BooleanDtype] = pa.Field(nullable=True, coerce=True)
    tuesday: Series[pd.BooleanDtype] = pa.Field(nullable=True, coerce=True)
    wednesday: Series[pd.BooleanDtype] = pa.Field(nullable=True, coerce=True)
    thursday: Series[pd.BooleanDtype] = pa.Field(nullable=True, coerce=True)
    friday: Series[pd.BooleanDtype] = pa.Field(nullable=True, coerce=True)
    saturday: Series[pd.BooleanDtype] = pa.Field(nullable=True, coerce=True)
    sunday: Series[pd.BooleanDtype] = pa.Field(nullable=True, coerce=True)

    class Config:
        """Schema configuration."""

        name = "CalendarFrameSchema"
        strict = False


class ShapeFrameSchema(pa.DataFrameModel):
    """Schema for exported shape points."""

    id: Series[str] = pa.Field(nullable=True, coerce=True)
    latitude: Series[float] = pa.Field(ge=-90.0, le=90.0, nullable=True, coerce=True)
    longitude: Series[float] = pa.Field(
        ge=-180.0, le=180.0, nullable=True, coerce=True
    )
    sequence: Series[pd.Int64Dtype] = pa.Field(ge=0, nullable=True, coerce=True)
    distance_traveled: Series[float] = pa.Field(ge=0.0, nullable=True, coerce=True)

    class Config:
        """Schema configuration."""

        name = "ShapeFrameSchema"
        strict = False


class TransferFrameSchema(pa.DataFrameModel):
    """Schema for exported transfers."""

    from_stop_id: Series[str] = pa.Field(nullable=True, coerce=True)
    to_stop_id: Series[str] = pa.Field(nullable=True, coerce=True)
    transfer_type: Series[str] = pa.Field(
        isin=_codes(TransferType), nullable=True, coerce=True
    )
    min_transfer_time: Series[pd.Int64Dtype] = pa.Field(
        ge=0, nullable=True, coerce=True
    )

    class Config:
        """Schema configuration."""

        name = "TransferFrameSchema"
        strict = False


# Keyed by table name. Tables not listed here are exported unvalidated.
FRAME_SCHEMAS: dict[str, type[pa.DataFrameModel]] = {
    "agency": AgencyFrameSchema,
    "stops": StopFrameSchema,
    "routes": RouteFrameSchema,
    "trips": TripFrameSchema,
    "stop_times": StopTimeFrameSchema,
    "calendar": CalendarFrameSchema,
    "shapes": ShapeFrameSchema,
    "transfers": TransferFrameSchema,
}
