"""
Ingestion error taxonomy.

Every error is fatal to the run: ingestion is fail-closed, so callers never
see a partially decoded feed presented as complete.
"""


class GTFSIngestError(Exception):
    """Base class for all ingestion errors."""


class MissingRequiredTable(GTFSIngestError):
    """A mandatory table is absent from the source."""

    def __init__(self, table_name: str) -> None:
        self.table_name = table_name
        super().__init__(f"Required table missing from source: {table_name!r}")


class SchedulingDeadlock(GTFSIngestError):
    """No remaining table can be read: a cycle or an absent prerequisite."""

    def __init__(self, remaining: list[str]) -> None:
        self.remaining = remaining
        super().__init__(
            "Could not select a next table to read; unsatisfiable dependencies "
            f"for: {', '.join(remaining)}"
        )


class MissingRequiredField(GTFSIngestError):
    """A table header lacks a column the entity kind requires."""

    def __init__(self, table_name: str, field_name: str) -> None:
        self.table_name = table_name
        self.field_name = field_name
        super().__init__(
            f"Required field {field_name!r} missing from table {table_name!r}"
        )


class FieldParseError(GTFSIngestError):
    """A raw field value could not be coerced to its declared type."""

    def __init__(
        self,
        table_name: str,
        field_name: str,
        value: str,
        cause: Exception | None = None,
    ) -> None:
        self.table_name = table_name
        self.field_name = field_name
        self.value = value
        self.cause = cause
        msg = f"Could not parse field {field_name!r} in table {table_name!r}: {value!r}"
        if cause is not None:
            msg = f"{msg} ({cause})"
        super().__init__(msg)
