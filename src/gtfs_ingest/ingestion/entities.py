"""
Decoder declarations for the GTFS tables.

Each entity kind is described by its required columns and its field
table. Required-column lists are kept as published, including repeated
names, which are checked idempotently.
"""

from gtfs_ingest.ingestion.coercion import (
    parse_accessibility_type,
    parse_bool,
    parse_color,
    parse_direction_type,
    parse_double,
    parse_drop_off_type,
    parse_exception_type,
    parse_location_type,
    parse_optional_string,
    parse_payment_method,
    parse_pickup_type,
    parse_route_type,
    parse_string,
    parse_transfer_type,
    parse_uint,
    required,
)
from gtfs_ingest.ingestion.decoder import EntityDecoder, field_table
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

AGENCY = EntityDecoder(
    table_name="agency",
    record_type=Agency,
    required_fields=("agency_id", "agency_name", "agency_url", "agency_timezone"),
    fields=field_table(
        ("agency_id", "id", parse_string),
        ("agency_name", "name", parse_string),
        ("agency_url", "url", parse_string),
        ("agency_timezone", "timezone", parse_string),
        ("agency_lang", "language_code", parse_optional_string),
        ("agency_phone", "phone", parse_optional_string),
    ),
    sink_method="add_agency",
)

STOPS = EntityDecoder(
    table_name="stops",
    record_type=Stop,
    required_fields=("stop_id", "stop_name", "stop_lat", "stop_lon"),
    fields=field_table(
        ("stop_id", "id", parse_string),
        ("stop_code", "code", parse_optional_string),
        ("stop_name", "name", parse_string),
        ("stop_desc", "description", parse_optional_string),
        ("stop_lat", "latitude", required(parse_double)),
        ("stop_lon", "longitude", required(parse_double)),
        ("zone_id", "zone", parse_optional_string),
        ("stop_url", "url", parse_optional_string),
        ("location_type", "location_type", parse_location_type),
        ("parent_station", "parent_station", parse_optional_string),
        ("stop_timezone", "timezone", parse_optional_string),
        ("wheelchair_boarding", "wheelchair_boarding", parse_accessibility_type),
    ),
    sink_method="add_stop",
)

ROUTES = EntityDecoder(
    table_name="routes",
    record_type=Route,
    required_fields=("route_id", "route_short_name", "route_long_name", "route_type"),
    fields=field_table(
        ("route_id", "id", parse_string),
        ("agency_id", "agency_id", parse_optional_string),
        ("route_short_name", "short_name", parse_string),
        ("route_long_name", "long_name", parse_string),
        ("route_desc", "description", parse_optional_string),
        ("route_type", "type", parse_route_type),
        ("route_url", "url", parse_optional_string),
        ("route_color", "color", parse_color),
        ("route_text_color", "text_color", parse_color),
    ),
    sink_method="add_route",
)

TRIPS = EntityDecoder(
    table_name="trips",
    record_type=Trip,
    required_fields=("trip_id", "route_id", "service_id"),
    fields=field_table(
        ("trip_id", "id", parse_string),
        ("route_id", "route_id", parse_string),
        ("service_id", "service_id", parse_string),
        ("trip_headsign", "headsign", parse_optional_string),
        ("trip_short_name", "short_name", parse_optional_string),
        ("direction_id", "direction", parse_direction_type),
        ("block_id", "block_id", parse_optional_string),
        ("shape_id", "shape_id", parse_optional_string),
        ("wheelchair_accessible", "accessibility_type", parse_accessibility_type),
    ),
    sink_method="add_trip",
)

STOP_TIMES = EntityDecoder(
    table_name="stop_times",
    record_type=StopTime,
    required_fields=(
        "trip_id",
        "arrival_time",
        "departure_time",
        "stop_id",
        "stop_sequence",
        "stop_id",
        "stop_id",
    ),
    fields=field_table(
        ("trip_id", "trip_id", parse_string),
        ("arrival_time", "arrival_time", parse_string),
        ("departure_time", "departure_time", parse_string),
        ("stop_id", "stop_id", parse_string),
        ("stop_sequence", "stop_sequence", required(parse_uint)),
        ("stop_headsign", "stop_headsign", parse_optional_string),
        ("pickup_type", "pickup_type", parse_pickup_type),
        ("drop_off_type", "drop_off_type", parse_drop_off_type),
        ("shape_dist_traveled", "shape_dist_traveled", parse_optional_string),
    ),
    sink_method="add_stop_time",
)

_WEEKDAYS = ("monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday")

CALENDAR = EntityDecoder(
    table_name="calendar",
    record_type=Calendar,
    required_fields=("service_id", *_WEEKDAYS, "start_date", "end_date"),
    fields=field_table(
        ("service_id", "service_id", parse_string),
        *((day, day, required(parse_bool)) for day in _WEEKDAYS),
        ("start_date", "start_date", parse_string),
        ("end_date", "end_date", parse_string),
    ),
    sink_method="add_calendar",
)

CALENDAR_DATES = EntityDecoder(
    table_name="calendar_dates",
    record_type=CalendarDate,
    required_fields=("service_id", "date", "exception_type"),
    fields=field_table(
        ("service_id", "service_id", parse_string),
        ("date", "date", parse_string),
        ("exception_type", "exception_type", parse_exception_type),
    ),
    sink_method="add_calendar_date",
)

FARE_ATTRIBUTES = EntityDecoder(
    table_name="fare_attributes",
    record_type=FareAttribute,
    required_fields=("fare_id", "price", "currency_type", "payment_method", "transfers"),
    fields=field_table(
        ("fare_id", "fare_id", parse_string),
        ("price", "price", parse_string),
        ("currency_type", "currency_type", parse_string),
        ("payment_method", "payment_method", parse_payment_method),
        # Empty means unlimited transfers.
        ("transfers", "transfers", parse_uint),
        ("transfer_duration", "transfer_duration", parse_optional_string),
    ),
    sink_method="add_fare_attribute",
)

FARE_RULES = EntityDecoder(
    table_name="fare_rules",
    record_type=FareRule,
    required_fields=("fare_id",),
    fields=field_table(
        ("fare_id", "fare_id", parse_string),
        ("route_id", "route_id", parse_optional_string),
        ("origin_id", "origin_id", parse_optional_string),
        ("destination_id", "destination_id", parse_optional_string),
        ("contains_id", "contains_id", parse_optional_string),
    ),
    sink_method="add_fare_rule",
)

SHAPES = EntityDecoder(
    table_name="shapes",
    record_type=Shape,
    required_fields=("shape_id", "shape_pt_lat", "shape_pt_lon", "shape_pt_sequence"),
    fields=field_table(
        ("shape_id", "id", parse_string),
        ("shape_pt_lat", "latitude", required(parse_double)),
        ("shape_pt_lon", "longitude", required(parse_double)),
        ("shape_pt_sequence", "sequence", required(parse_uint)),
        ("shape_dist_traveled", "distance_traveled", parse_double),
    ),
    sink_method="add_shape",
)

FREQUENCIES = EntityDecoder(
    table_name="frequencies",
    record_type=Frequency,
    required_fields=("trip_id", "start_time", "end_time", "headway_secs"),
    fields=field_table(
        ("trip_id", "trip_id", parse_string),
        ("start_time", "start_time", parse_string),
        ("end_time", "end_time", parse_string),
        ("headway_secs", "headway_secs", parse_string),
        ("exact_times", "exact_times", parse_bool),
    ),
    sink_method="add_frequency",
)

FEED_INFO = EntityDecoder(
    table_name="feed_info",
    record_type=FeedInfo,
    required_fields=("feed_publisher_name", "feed_publisher_url", "feed_lang"),
    fields=field_table(
        ("feed_publisher_name", "publisher_name", parse_string),
        ("feed_publisher_url", "publisher_url", parse_string),
        ("feed_lang", "language", parse_string),
        ("feed_start_date", "start_date", parse_optional_string),
        ("feed_end_date", "end_date", parse_optional_string),
        ("feed_version", "version", parse_optional_string),
    ),
    sink_method="add_feed_info",
)

TRANSFERS = EntityDecoder(
    table_name="transfers",
    record_type=Transfer,
    required_fields=("from_stop_id", "to_stop_id", "transfer_type"),
    fields=field_table(
        ("from_stop_id", "from_stop_id", parse_string),
        ("to_stop_id", "to_stop_id", parse_string),
        ("transfer_type", "transfer_type", parse_transfer_type),
        ("min_transfer_time", "min_transfer_time", parse_uint),
    ),
    sink_method="add_transfer",
)

DEFAULT_DECODERS: tuple[EntityDecoder, ...] = (
    AGENCY,
    STOPS,
    ROUTES,
    TRIPS,
    STOP_TIMES,
    CALENDAR,
    CALENDAR_DATES,
    FARE_ATTRIBUTES,
    FARE_RULES,
    SHAPES,
    FREQUENCIES,
    FEED_INFO,
    TRANSFERS,
)
