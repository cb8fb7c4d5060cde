"""Grid persistence: save and load generated worlds."""

import json
import logging
from datetime import datetime, timezone
from pathlib import Path

import numpy as np

from ..grid import TerrainGrid
from .config import TerrainConfig

logger = logging.getLogger(__name__)

FORMAT_VERSION = 1


def save_grid(path: Path, grid: TerrainGrid, config: TerrainConfig) -> Path:
    """Save a generated grid to disk.

    Uses numpy's compressed .npz format for efficient storage.

    Args:
        path: Output path (should end with .npz).
        grid: Generated terrain grid.
        config: Generation configuration used.

    Returns:
        Path written.
    """
    # np.savez_compressed appends .npz to any other suffix
    path = path.with_suffix(".npz")

    metadata = {
        "version": FORMAT_VERSION,
        "seed": config.seed,
        "columns": grid.columns,
        "rows": grid.rows,
        "water_row": config.target_water_row,
        "config": config.model_dump(),
        "generated_at": datetime.now(timezone.utc).isoformat(),
    }

    np.savez_compressed(
        path,
        blocks=grid.cells,
        metadata=np.frombuffer(json.dumps(metadata).encode("utf-8"), dtype=np.uint8),
    )

    file_size = path.stat().st_size / 1024
    logger.info(f"Saved grid to {path} ({file_size:.1f} KB)")
    return path


def load_grid(path: Path) -> tuple[TerrainGrid, dict]:
    """Load a grid from disk.

    Args:
        path: Path to .npz file.

    Returns:
        Tuple of (TerrainGrid, metadata dict).

    Raises:
        FileNotFoundError: If file doesn't exist.
        ValueError: If file format is invalid.
    """
    if not path.exists():
        raise FileNotFoundError(f"Grid file not found: {path}")

    with np.load(path) as data:
        if "blocks" not in data:
            raise ValueError("Invalid grid file: missing 'blocks' array")
        grid = TerrainGrid.from_array(data["blocks"])

        if "metadata" in data:
            metadata = json.loads(data["metadata"].tobytes().decode("utf-8"))
        else:
            metadata = {}

    logger.info(f"Loaded grid from {path}: {grid.columns}x{grid.rows}")
    return grid, metadata
