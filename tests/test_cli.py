"""Tests for the command-line interface."""

from pathlib import Path

from typer.testing import CliRunner

from gtfs_ingest.cli import app

runner = CliRunner()


class TestIngestCommand:
    """Tests for `gtfs-ingest ingest`."""

    def test_ingest(self, feed_dir: Path) -> None:
        result = runner.invoke(app, ["ingest", str(feed_dir), "--log-level", "ERROR"])
        assert result.exit_code == 0, result.output
        assert "stop_times" in result.output
        assert "Read 10 records" in result.output

    def test_missing_mandatory_table(self, feed_dir: Path) -> None:
        (feed_dir / "calendar.txt").unlink()
        result = runner.invoke(app, ["ingest", str(feed_dir), "--log-level", "ERROR"])
        assert result.exit_code == 1
        assert "calendar" in result.output

    def test_with_config(self, feed_dir: Path, tmp_path: Path) -> None:
        config = tmp_path / "ingest.yaml"
        config.write_text("logging:\n  level: ERROR\n", encoding="utf-8")
        result = runner.invoke(app, ["ingest", str(feed_dir), "--config", str(config)])
        assert result.exit_code == 0, result.output


class TestOrderCommand:
    """Tests for `gtfs-ingest order`."""

    def test_order(self, feed_dir: Path) -> None:
        (feed_dir / "pathways.txt").write_text("pathway_id\n", encoding="utf-8")
        result = runner.invoke(app, ["order", str(feed_dir)])
        assert result.exit_code == 0, result.output
        lines = [line.split(". ", 1)[1] for line in result.output.splitlines() if ". " in line]
        names = [line.split()[0] for line in lines]
        assert names.index("agency") < names.index("routes") < names.index("trips")
        assert names.index("trips") < names.index("stop_times")
        assert "(no decoder)" in result.output
