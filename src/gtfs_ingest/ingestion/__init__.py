"""
Decoding of GTFS tables into typed records.

Tables are read in dependency order; each row is decoded through the
per-table field declarations and pushed to a sink.
"""

from gtfs_ingest.ingestion.decoder import EntityDecoder, FieldSpec, field_table
from gtfs_ingest.ingestion.engine import IngestionEngine, IngestionResult, run_ingestion
from gtfs_ingest.ingestion.errors import (
    FieldParseError,
    GTFSIngestError,
    MissingRequiredField,
    MissingRequiredTable,
    SchedulingDeadlock,
)
from gtfs_ingest.ingestion.header import Header, check_required_fields
from gtfs_ingest.ingestion.protocols import FeedSink, SourceTable
from gtfs_ingest.ingestion.registry import DecoderRegistry
from gtfs_ingest.ingestion.scheduler import iter_schedule, schedule
from gtfs_ingest.ingestion.sources import CsvTable, InMemoryTable, load_directory_source

__all__ = [
    "CsvTable",
    "DecoderRegistry",
    "EntityDecoder",
    "FeedSink",
    "FieldParseError",
    "FieldSpec",
    "GTFSIngestError",
    "Header",
    "InMemoryTable",
    "IngestionEngine",
    "IngestionResult",
    "MissingRequiredField",
    "MissingRequiredTable",
    "SchedulingDeadlock",
    "SourceTable",
    "check_required_fields",
    "field_table",
    "iter_schedule",
    "load_directory_source",
    "run_ingestion",
    "schedule",
]
