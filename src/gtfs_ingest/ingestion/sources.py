"""
Table sources.

CsvTable streams a GTFS text file through pandas in chunks, so only one
chunk of rows is held in memory at a time. Rows keep the number of fields
they have in the file, cut to the header width when longer.
"""

from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import pandas as pd

from gtfs_ingest.config.settings import SourceConfig
from gtfs_ingest.utils.logging import get_logger

log = get_logger(__name__)


@dataclass
class InMemoryTable:
    """A table backed by already-tokenized rows, header first."""

    name: str
    rows: Sequence[Sequence[str]] = field(default_factory=list)

    def __iter__(self) -> Iterator[list[str]]:
        for row in self.rows:
            yield list(row)


def _row_values(row: tuple[object, ...]) -> list[str]:
    """
    Return the fields a row actually holds.

    pandas pads a row shorter than the header with missing values; an empty
    field that is present in the file stays an empty string.
    """
    values = list(row)
    while values and not isinstance(values[-1], str):
        values.pop()
    return [str(v) for v in values]


class CsvTable:
    """A GTFS table read from a CSV file."""

    def __init__(
        self,
        path: Path,
        name: str | None = None,
        *,
        encoding: str = "utf-8-sig",
        chunk_size: int = 10_000,
    ) -> None:
        """
        Initialize a CSV-backed table.

        Args:
            path: CSV file to read.
            name: Table name; defaults to the file name without suffix.
            encoding: Text encoding. The default strips a UTF-8 BOM.
            chunk_size: Rows read from disk at a time.
        """
        self.path = path
        self.name = name if name is not None else path.stem
        self.encoding = encoding
        self.chunk_size = chunk_size

    def __repr__(self) -> str:
        return f"CsvTable(name={self.name!r}, path={str(self.path)!r})"

    def __iter__(self) -> Iterator[list[str]]:
        if not self.path.exists():
            msg = f"Table file not found: {self.path}"
            raise FileNotFoundError(msg)

        try:
            width = self._read(nrows=1).shape[1]
        except pd.errors.EmptyDataError:
            log.debug("Table file is empty", table=self.name, path=str(self.path))
            return

        def truncate(fields: list[str]) -> list[str]:
            log.debug(
                "Ignoring values beyond the header",
                table=self.name,
                extra=len(fields) - width,
            )
            return fields[:width]

        with self._read(chunksize=self.chunk_size, on_bad_lines=truncate) as reader:
            for chunk in reader:
                for row in chunk.itertuples(index=False, name=None):
                    yield _row_values(row)

    def _read(self, **kwargs: Any) -> Any:
        # A callable on_bad_lines needs the python engine.
        return pd.read_csv(
            self.path,
            header=None,
            dtype=str,
            keep_default_na=False,
            na_filter=False,
            encoding=self.encoding,
            engine="python",
            **kwargs,
        )


def load_directory_source(
    path: Path, config: SourceConfig | None = None
) -> list[CsvTable]:
    """
    Create one table per GTFS file in a directory.

    Args:
        path: Directory holding the feed's text files.
        config: Source options; defaults to SourceConfig().

    Returns:
        Tables sorted by file name.

    Raises:
        FileNotFoundError: If the directory does not exist.
    """
    config = config or SourceConfig()
    if not path.is_dir():
        msg = f"Feed directory not found: {path}"
        raise FileNotFoundError(msg)

    files = sorted(
        p for p in path.iterdir() if p.is_file() and p.suffix == config.file_suffix
    )
    log.info("Discovered feed tables", path=str(path), tables=[p.stem for p in files])
    return [
        CsvTable(p, encoding=config.encoding, chunk_size=config.chunk_size)
        for p in files
    ]
