"""
gtfs-ingest: typed ingestion of GTFS transit schedule feeds.

This package decodes the tables of a GTFS feed into typed records,
reading tables in dependency order and validating every field.
"""

from importlib.metadata import version

__version__ = version("gtfs-ingest")

__all__ = ["__version__"]
