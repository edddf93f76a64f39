"""
Typed configuration models using Pydantic.

The defaults describe a standard GTFS feed: the six mandatory tables and
the read-order constraints between them. Projects that carry extension
tables override these in YAML rather than in code.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from gtfs_ingest.utils.naming import normalize_table_name

DEFAULT_MANDATORY_TABLES: tuple[str, ...] = (
    "agency",
    "stops",
    "routes",
    "trips",
    "stop_times",
    "calendar",
)

DEFAULT_DEPENDENCIES: dict[str, tuple[str, ...]] = {
    "fare_rules": ("routes",),
    "frequencies": ("trips",),
    "routes": ("agency",),
    "stop_times": ("trips",),
    "trips": ("routes",),
}


class SourceConfig(BaseModel):
    """How physical table files are located and read."""

    model_config = ConfigDict(frozen=True)

    encoding: str = Field(default="utf-8-sig", description="Text encoding of table files")
    chunk_size: int = Field(
        default=10_000, ge=1, description="Rows pulled from disk per read"
    )
    file_suffix: str = Field(default=".txt", description="Suffix of table files")


class LoggingConfig(BaseModel):
    """Logging output configuration."""

    model_config = ConfigDict(frozen=True)

    level: str = Field(default="INFO", description="Log level name")
    json_output: bool = Field(default=False, description="Render logs as JSON lines")

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Normalize and check the log level name."""
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            msg = f"Unknown log level: {v!r}"
            raise ValueError(msg)
        return level


class IngestionConfig(BaseModel):
    """Complete ingestion configuration."""

    model_config = ConfigDict(frozen=True)

    mandatory_tables: tuple[str, ...] = Field(
        default=DEFAULT_MANDATORY_TABLES,
        description="Tables that must be present before anything is decoded",
    )
    dependencies: dict[str, tuple[str, ...]] = Field(
        default_factory=lambda: dict(DEFAULT_DEPENDENCIES),
        description="Table -> tables that must be fully decoded first",
    )
    source: SourceConfig = Field(default_factory=SourceConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @field_validator("dependencies")
    @classmethod
    def validate_dependencies(
        cls, v: dict[str, tuple[str, ...]]
    ) -> dict[str, tuple[str, ...]]:
        """Reject tables that list themselves as a prerequisite, in any letter case."""
        for table, prerequisites in v.items():
            key = normalize_table_name(table)
            if any(normalize_table_name(p) == key for p in prerequisites):
                msg = f"Table {table!r} cannot depend on itself"
                raise ValueError(msg)
        return v

    def dependency_graph(self) -> dict[str, frozenset[str]]:
        """Return the dependencies as an immutable lookup for the scheduler."""
        return {table: frozenset(deps) for table, deps in self.dependencies.items()}
