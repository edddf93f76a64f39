"""Tests for configuration system."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from gtfs_ingest.config import (
    DEFAULT_DEPENDENCIES,
    DEFAULT_MANDATORY_TABLES,
    IngestionConfig,
    LoggingConfig,
    SourceConfig,
    load_config,
)


class TestIngestionConfig:
    """Tests for IngestionConfig."""

    def test_defaults(self) -> None:
        config = IngestionConfig()
        assert config.mandatory_tables == DEFAULT_MANDATORY_TABLES
        assert config.dependencies == DEFAULT_DEPENDENCIES
        assert config.source == SourceConfig()
        assert config.logging.level == "INFO"

    def test_dependency_graph(self) -> None:
        graph = IngestionConfig().dependency_graph()
        assert graph["routes"] == frozenset({"agency"})
        assert graph["stop_times"] == frozenset({"trips"})
        assert "agency" not in graph

    def test_self_dependency_rejected(self) -> None:
        with pytest.raises(ValueError, match="cannot depend on itself"):
            IngestionConfig(dependencies={"trips": ("trips",)})

    def test_self_dependency_ignores_case(self) -> None:
        """Names that differ only in case or spacing are the same table."""
        with pytest.raises(ValueError, match="cannot depend on itself"):
            IngestionConfig(dependencies={"Routes": ("routes",)})
        with pytest.raises(ValueError, match="cannot depend on itself"):
            IngestionConfig(dependencies={"trips": (" TRIPS ",)})

    def test_frozen(self) -> None:
        config = IngestionConfig()
        with pytest.raises(ValidationError):
            config.mandatory_tables = ()  # type: ignore[misc]


class TestLoggingConfig:
    """Tests for LoggingConfig."""

    def test_level_is_normalized(self) -> None:
        assert LoggingConfig(level="debug").level == "DEBUG"

    def test_unknown_level(self) -> None:
        with pytest.raises(ValueError, match="Unknown log level"):
            LoggingConfig(level="loud")


class TestSourceConfig:
    """Tests for SourceConfig."""

    def test_chunk_size_must_be_positive(self) -> None:
        with pytest.raises(ValueError):
            SourceConfig(chunk_size=0)


class TestLoadConfig:
    """Tests for YAML loading."""

    def test_load(self, tmp_path: Path) -> None:
        path = tmp_path / "ingest.yaml"
        path.write_text(
            "mandatory_tables: [agency, stops]\n"
            "dependencies:\n"
            "  routes: [agency]\n"
            "  levels: [stops]\n"
            "source:\n"
            "  chunk_size: 500\n",
            encoding="utf-8",
        )
        config = load_config(path)
        assert config.mandatory_tables == ("agency", "stops")
        assert config.dependencies == {"routes": ("agency",), "levels": ("stops",)}
        assert config.source.chunk_size == 500

    def test_empty_file_gives_defaults(self, tmp_path: Path) -> None:
        path = tmp_path / "ingest.yaml"
        path.write_text("", encoding="utf-8")
        assert load_config(path) == IngestionConfig()

    def test_env_interpolation(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("GTFS_LOG_LEVEL", "warning")
        path = tmp_path / "ingest.yaml"
        path.write_text(
            "logging:\n"
            "  level: ${GTFS_LOG_LEVEL}\n"
            "source:\n"
            "  encoding: ${GTFS_ENCODING:latin-1}\n",
            encoding="utf-8",
        )
        config = load_config(path)
        assert config.logging.level == "WARNING"
        assert config.source.encoding == "latin-1"

    def test_base_inheritance(self, tmp_path: Path) -> None:
        (tmp_path / "base.yaml").write_text(
            "source:\n  encoding: latin-1\n  chunk_size: 100\n", encoding="utf-8"
        )
        path = tmp_path / "project.yaml"
        path.write_text("source:\n  chunk_size: 200\n", encoding="utf-8")
        config = load_config(path)
        assert config.source.encoding == "latin-1"
        assert config.source.chunk_size == 200

    def test_explicit_base_path(self, tmp_path: Path) -> None:
        base = tmp_path / "shared" / "defaults.yaml"
        base.parent.mkdir()
        base.write_text("logging:\n  json_output: true\n", encoding="utf-8")
        path = tmp_path / "project.yaml"
        path.write_text("logging:\n  level: ERROR\n", encoding="utf-8")
        config = load_config(path, base_path=base)
        assert config.logging.json_output is True
        assert config.logging.level == "ERROR"

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError, match="Config file not found"):
            load_config(tmp_path / "missing.yaml")

    def test_non_mapping(self, tmp_path: Path) -> None:
        path = tmp_path / "ingest.yaml"
        path.write_text("- agency\n- stops\n", encoding="utf-8")
        with pytest.raises(ValueError, match="mapping"):
            load_config(path)

    def test_invalid_dependencies(self, tmp_path: Path) -> None:
        path = tmp_path / "ingest.yaml"
        path.write_text("dependencies: [routes]\n", encoding="utf-8")
        with pytest.raises(ValueError, match="dependencies"):
            load_config(path)
