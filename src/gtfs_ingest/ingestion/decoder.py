"""
Generic table decoder.

An EntityDecoder is pure data: the table it reads, the record type it
builds, the columns it requires and a column-name -> FieldSpec table.
Supporting a new table or column means declaring one of these, not
subclassing.
"""

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from gtfs_ingest.ingestion.coercion import Coercion
from gtfs_ingest.ingestion.header import Header, check_required_fields

R = TypeVar("R")


@dataclass(frozen=True)
class FieldSpec:
    """How one column is coerced and which record attribute receives it."""

    attribute: str
    coerce: Coercion


def field_table(*specs: tuple[str, str, Coercion]) -> dict[str, FieldSpec]:
    """Build a field table from ``(column, attribute, coercion)`` triples."""
    return {column: FieldSpec(attribute, coerce) for column, attribute, coerce in specs}


@dataclass(frozen=True, eq=False)
class EntityDecoder(Generic[R]):
    """
    Decodes the rows of one table into records of one entity kind.

    Attributes:
        table_name: Table this decoder reads (matched case-insensitively).
        record_type: Record class built from each row.
        required_fields: Columns the header must contain, checked in order.
        fields: Column name -> FieldSpec. Unlisted columns are ignored.
        sink_method: Name of the sink method that accepts the records.
    """

    table_name: str
    record_type: type[R]
    required_fields: tuple[str, ...]
    fields: Mapping[str, FieldSpec]
    sink_method: str

    def decode_row(self, header: Header, row: Sequence[str]) -> R:
        """
        Decode one data row.

        Values are matched to fields by header position, so column order
        does not matter. With duplicate header names the rightmost value
        wins. Values beyond the header are ignored.

        Raises:
            FieldParseError: On the first value that fails coercion.
        """
        values: dict[str, Any] = {}
        for index, raw in enumerate(row):
            column = header.name_at(index)
            if column is None:
                continue
            spec = self.fields.get(column)
            if spec is None:
                continue
            values[spec.attribute] = spec.coerce(header.table_name, column, raw)
        return self.record_type(**values)

    def decode(
        self,
        table: Iterable[Sequence[str]],
        sink: Any,
        *,
        table_name: str | None = None,
    ) -> int:
        """
        Decode a whole table and push every record to the sink.

        The required columns are checked once, when the first data row
        arrives; a table with only a header is accepted as is.

        Args:
            table: Rows of the table, header first. Objects with a ``name``
                attribute report that name in errors.
            sink: Object exposing ``sink_method``.
            table_name: Name used in errors, overriding ``table.name``.

        Returns:
            Number of records pushed to the sink.

        Raises:
            MissingRequiredField: If the header lacks a required column.
            FieldParseError: If any value fails coercion.
        """
        name = table_name or getattr(table, "name", self.table_name)
        accept = getattr(sink, self.sink_method)

        rows = iter(table)
        first = next(rows, None)
        if first is None:
            return 0
        header = Header.from_row(name, first)

        count = 0
        for row in rows:
            if count == 0:
                check_required_fields(header, name, self.required_fields)
            accept(self.decode_row(header, row))
            count += 1
        return count
