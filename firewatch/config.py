"""
Runtime settings for the fire data pipeline.

Values come from the process environment, with a local .env file loaded
first for development.
"""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from .firms.clustering import DEFAULT_CELL_SIZE_DEG, DEFAULT_MAX_CELLS
from .validation.data_validator import DEFAULT_MAX_AGE_MINUTES

DEFAULT_SNAPSHOT_PATH = "data/fires_snapshot.csv"
DEFAULT_OUTPUT_DIR = "output"


@dataclass(frozen=True)
class Settings:
    snapshot_path: str = DEFAULT_SNAPSHOT_PATH
    output_dir: str = DEFAULT_OUTPUT_DIR
    max_cluster_cells: int = DEFAULT_MAX_CELLS
    cluster_cell_deg: float = DEFAULT_CELL_SIZE_DEG
    snapshot_max_age_minutes: int = DEFAULT_MAX_AGE_MINUTES


def load_settings(dotenv_path: Optional[str] = None) -> Settings:
    """
    Build settings from environment variables.

    Args:
        dotenv_path: Optional .env file to load; by default the nearest .env
            is used if one exists. Variables already set in the environment win.

    Returns:
        Settings

    Raises:
        ValueError: If a numeric variable cannot be parsed or is out of range
    """
    load_dotenv(dotenv_path)

    max_cells = _env_int("FIREWATCH_MAX_CLUSTER_CELLS", DEFAULT_MAX_CELLS)
    if max_cells < 0:
        raise ValueError(f"FIREWATCH_MAX_CLUSTER_CELLS must be >= 0, got {max_cells}")

    cell_deg = _env_float("FIREWATCH_CLUSTER_CELL_DEG", DEFAULT_CELL_SIZE_DEG)
    if not cell_deg > 0:
        raise ValueError(f"FIREWATCH_CLUSTER_CELL_DEG must be > 0, got {cell_deg}")

    return Settings(
        snapshot_path=os.getenv("FIREWATCH_SNAPSHOT_PATH", DEFAULT_SNAPSHOT_PATH),
        output_dir=os.getenv("FIREWATCH_OUTPUT_DIR", DEFAULT_OUTPUT_DIR),
        max_cluster_cells=max_cells,
        cluster_cell_deg=cell_deg,
        snapshot_max_age_minutes=_env_int(
            "FIREWATCH_SNAPSHOT_MAX_AGE_MIN", DEFAULT_MAX_AGE_MINUTES
        ),
    )


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}") from None
