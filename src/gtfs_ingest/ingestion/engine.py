"""
Ingestion engine.

Checks that the mandatory tables are present, reads the tables in
dependency order and pushes every decoded record to the sink. Any error
aborts the run; records already pushed for earlier tables stay with the
sink, nothing is rolled back.
"""

from collections import defaultdict, deque
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

from gtfs_ingest.config.settings import IngestionConfig
from gtfs_ingest.ingestion.errors import (
    FieldParseError,
    GTFSIngestError,
    MissingRequiredField,
    MissingRequiredTable,
    SchedulingDeadlock,
)
from gtfs_ingest.ingestion.protocols import SourceTable
from gtfs_ingest.ingestion.registry import DecoderRegistry
from gtfs_ingest.ingestion.scheduler import iter_schedule
from gtfs_ingest.utils.logging import get_logger, log_context
from gtfs_ingest.utils.naming import normalize_table_name

log = get_logger(__name__)


@dataclass
class IngestionResult:
    """
    Result of an ingestion run.

    Attributes:
        sink: The sink that received the records.
        order: Decoded tables, in the order they were read.
        counts: Records pushed per decoded table.
        skipped: Tables present in the source without a registered decoder.
    """

    sink: Any
    order: list[str] = field(default_factory=list)
    counts: dict[str, int] = field(default_factory=dict)
    skipped: list[str] = field(default_factory=list)

    @property
    def total_records(self) -> int:
        return sum(self.counts.values())


def _error_fields(error: GTFSIngestError) -> dict[str, Any]:
    """Structured log fields for an ingestion error."""
    if isinstance(error, MissingRequiredTable):
        return {"table": error.table_name}
    if isinstance(error, SchedulingDeadlock):
        return {"remaining": error.remaining}
    if isinstance(error, MissingRequiredField):
        return {"table": error.table_name, "field": error.field_name}
    if isinstance(error, FieldParseError):
        return {
            "table": error.table_name,
            "field": error.field_name,
            "value": error.value,
            "cause": repr(error.cause) if error.cause is not None else None,
        }
    return {}


class IngestionEngine:
    """
    Drives the decoders over a source.

    The engine keeps no state between runs: each call to ``ingest`` starts
    with fresh scheduling state, so one engine can serve several threads
    as long as each run has its own source and sink.
    """

    def __init__(
        self,
        registry: DecoderRegistry | None = None,
        config: IngestionConfig | None = None,
    ) -> None:
        """
        Initialize the engine.

        Args:
            registry: Decoders by table name. Defaults to the GTFS tables.
            config: Mandatory tables and dependency graph.
        """
        self.registry = registry or DecoderRegistry.default()
        self.config = config or IngestionConfig()

    def check_mandatory_tables(self, table_names: Iterable[str]) -> None:
        """
        Raise MissingRequiredTable for the first mandatory table not present.

        Table names compare case-insensitively.
        """
        present = {normalize_table_name(name) for name in table_names}
        for name in self.config.mandatory_tables:
            if normalize_table_name(name) not in present:
                raise MissingRequiredTable(name)

    def plan(self, table_names: list[str]) -> list[str]:
        """Return the read order for the given tables without decoding."""
        self.check_mandatory_tables(table_names)
        return list(iter_schedule(table_names, self.config.dependency_graph()))

    def ingest(self, source: Iterable[SourceTable], sink: Any) -> IngestionResult:
        """
        Decode every table of ``source`` into ``sink``.

        Args:
            source: Tables of the feed.
            sink: Receives the records; see FeedSink.

        Returns:
            IngestionResult describing the run.

        Raises:
            MissingRequiredTable: Before anything is decoded.
            SchedulingDeadlock: When no remaining table can be read.
            MissingRequiredField: When a table lacks a required column.
            FieldParseError: On the first value that fails coercion.
        """
        tables = list(source)
        names = [table.name for table in tables]
        by_name: dict[str, deque[SourceTable]] = defaultdict(deque)
        for table in tables:
            by_name[table.name].append(table)

        result = IngestionResult(sink=sink)
        log.info("Starting ingestion", tables=len(tables))

        try:
            self.check_mandatory_tables(names)
            for name in iter_schedule(names, self.config.dependency_graph()):
                table = by_name[name].popleft()
                decoder = self.registry.get(name)
                if decoder is None:
                    log.debug("Skipping table without decoder", table=name)
                    result.skipped.append(name)
                    continue

                with log_context(table=name):
                    count = decoder.decode(table, sink, table_name=name)
                log.info("Decoded table", table=name, records=count)
                result.order.append(name)
                result.counts[name] = result.counts.get(name, 0) + count
        except GTFSIngestError as e:
            log.error("Ingestion failed", error=type(e).__name__, **_error_fields(e))
            raise

        log.info(
            "Ingestion complete",
            tables=len(result.order),
            records=result.total_records,
            skipped=result.skipped,
        )
        return result


def run_ingestion(
    source: Iterable[SourceTable],
    sink: Any | None = None,
    config: IngestionConfig | None = None,
    registry: DecoderRegistry | None = None,
) -> IngestionResult:
    """
    Convenience function to ingest a source.

    Args:
        source: Tables of the feed.
        sink: Receives the records. Defaults to a new GTFSFeed.
        config: Ingestion configuration.
        registry: Decoder registry.

    Returns:
        IngestionResult; ``result.sink`` holds the records.
    """
    if sink is None:
        from gtfs_ingest.feed import GTFSFeed

        sink = GTFSFeed()
    engine = IngestionEngine(registry=registry, config=config)
    return engine.ingest(source, sink)
