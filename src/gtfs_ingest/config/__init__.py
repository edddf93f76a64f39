"""
Configuration management with typed Pydantic models.

Provides the mandatory-table set, the table dependency graph and
source/logging options, loadable from YAML.
"""

from gtfs_ingest.config.loader import load_config
from gtfs_ingest.config.settings import (
    DEFAULT_DEPENDENCIES,
    DEFAULT_MANDATORY_TABLES,
    IngestionConfig,
    LoggingConfig,
    SourceConfig,
)

__all__ = [
    "DEFAULT_DEPENDENCIES",
    "DEFAULT_MANDATORY_TABLES",
    "IngestionConfig",
    "LoggingConfig",
    "SourceConfig",
    "load_config",
]
