"""Table header lookup and required-column validation."""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from gtfs_ingest.ingestion.errors import MissingRequiredField


@dataclass(frozen=True)
class Header:
    """
    Column names of a table, in physical order.

    Lookups are exact and case-sensitive. Duplicate names are kept;
    ``index_of`` returns the first occurrence.
    """

    table_name: str
    columns: tuple[str, ...]

    @classmethod
    def from_row(cls, table_name: str, row: Iterable[str]) -> "Header":
        """Build a header from a table's first row."""
        return cls(table_name=table_name, columns=tuple(row))

    def has_column(self, name: str) -> bool:
        return name in self.columns

    def index_of(self, name: str) -> int | None:
        try:
            return self.columns.index(name)
        except ValueError:
            return None

    def name_at(self, index: int) -> str | None:
        if 0 <= index < len(self.columns):
            return self.columns[index]
        return None

    def __len__(self) -> int:
        return len(self.columns)


def check_required_fields(
    header: Header, table_name: str, required: Sequence[str]
) -> None:
    """
    Check that every required column is present in the header.

    Names are checked in declared order, so the first missing one is the
    one reported. Repeated names are harmless.

    Raises:
        MissingRequiredField: For the first required column not found.
    """
    for name in required:
        if not header.has_column(name):
            raise MissingRequiredField(table_name, name)
