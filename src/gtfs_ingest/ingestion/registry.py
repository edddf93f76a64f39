"""
Decoder registry.

Maps table names to decoders. A registry is populated once before a run
and only read during it, so several runs can share one.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field

from gtfs_ingest.ingestion.decoder import EntityDecoder
from gtfs_ingest.ingestion.entities import DEFAULT_DECODERS
from gtfs_ingest.utils.logging import get_logger
from gtfs_ingest.utils.naming import normalize_table_name

log = get_logger(__name__)


@dataclass
class DecoderRegistry:
    """Registry of decoders keyed by normalized table name."""

    decoders: dict[str, EntityDecoder] = field(default_factory=dict)

    @classmethod
    def default(cls) -> "DecoderRegistry":
        """Create a registry holding decoders for all standard GTFS tables."""
        return cls.from_decoders(DEFAULT_DECODERS)

    @classmethod
    def from_decoders(cls, decoders: Iterable[EntityDecoder]) -> "DecoderRegistry":
        registry = cls()
        for decoder in decoders:
            registry.register(decoder)
        return registry

    def register(self, decoder: EntityDecoder, *, replace: bool = False) -> None:
        """
        Register a decoder for its table.

        Args:
            decoder: Decoder to register.
            replace: Allow replacing a decoder registered for the same table.

        Raises:
            ValueError: If the table already has a decoder and replace is False.
        """
        key = normalize_table_name(decoder.table_name)
        if key in self.decoders and not replace:
            msg = f"A decoder is already registered for table {decoder.table_name!r}"
            raise ValueError(msg)
        if key in self.decoders:
            log.debug("Replacing decoder", table=decoder.table_name)
        self.decoders[key] = decoder

    def get(self, table_name: str) -> EntityDecoder | None:
        """Return the decoder for a table, or None if the table is unknown."""
        return self.decoders.get(normalize_table_name(table_name))

    def __contains__(self, table_name: object) -> bool:
        return isinstance(table_name, str) and self.get(table_name) is not None

    def table_names(self) -> list[str]:
        """List the registered table names."""
        return [decoder.table_name for decoder in self.decoders.values()]
