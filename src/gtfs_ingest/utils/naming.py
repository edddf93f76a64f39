"""Table name normalization shared by configuration and ingestion."""


def normalize_table_name(name: str) -> str:
    """Canonical form of a table name for case-insensitive matching."""
    return name.strip().casefold()
