"""Integration tests for the command-line entry point."""

from __future__ import annotations

import json
import os

import pytest

from firewatch.firewatch_main import main


@pytest.fixture(autouse=True)
def clean_env(monkeypatch) -> None:
    """Keep settings variables from the outer environment out of the run."""
    for name in [
        "FIREWATCH_SNAPSHOT_PATH",
        "FIREWATCH_OUTPUT_DIR",
        "FIREWATCH_MAX_CLUSTER_CELLS",
        "FIREWATCH_CLUSTER_CELL_DEG",
        "FIREWATCH_SNAPSHOT_MAX_AGE_MIN",
    ]:
        monkeypatch.delenv(name, raising=False)


def test_main_writes_all_outputs(tmp_path, firms_csv_text: str, capsys) -> None:
    """A valid snapshot produces tables, GeoJSON and a summary."""
    snapshot = tmp_path / "fires.csv"
    snapshot.write_text(firms_csv_text, encoding="utf-8")
    output_dir = tmp_path / "output"

    exit_code = main(["--snapshot", str(snapshot), "--output-dir", str(output_dir)])

    assert exit_code == 0
    for name in [
        "fires_cleaned.parquet",
        "fire_clusters.parquet",
        "fires.geojson",
        "fire_clusters.geojson",
    ]:
        assert os.path.exists(output_dir / name)
    fires = json.loads((output_dir / "fires.geojson").read_text(encoding="utf-8"))
    assert len(fires["features"]) == 3
    assert "totalFires: 3" in capsys.readouterr().out


def test_main_missing_snapshot(tmp_path, capsys) -> None:
    """A missing snapshot exits with status 1."""
    exit_code = main(
        ["--snapshot", str(tmp_path / "absent.csv"), "--output-dir", str(tmp_path), "--quiet"]
    )

    assert exit_code == 1
    assert "[ERROR]" in capsys.readouterr().out


def test_main_invalid_snapshot(tmp_path) -> None:
    """A file that is not a fire table exits with status 1."""
    snapshot = tmp_path / "bad.csv"
    snapshot.write_text("message\nservice unavailable\n", encoding="utf-8")

    exit_code = main(["--snapshot", str(snapshot), "--output-dir", str(tmp_path), "--quiet"])

    assert exit_code == 1
    assert not os.path.exists(tmp_path / "fires.geojson")
