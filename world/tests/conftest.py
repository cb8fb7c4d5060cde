"""Shared test fixtures for world tests."""

from typing import Callable

import numpy as np
import pytest

from islandworld.block_types import BlockType
from islandworld.grid import TerrainGrid
from islandworld.terrain.config import TerrainConfig
from islandworld.terrain.generator import GenerationResult, generate_terrain

# Single-character block legend for hand-drawn grids
BLOCK_CHARS: dict[str, BlockType] = {
    ".": BlockType.AIR,
    "~": BlockType.WATER,
    "s": BlockType.SAND,
    "d": BlockType.DIRT,
    "g": BlockType.GRASS,
    "#": BlockType.STONE,
}


@pytest.fixture
def grid_from_rows() -> Callable[..., TerrainGrid]:
    """Build a grid from strings, one per row, top row first.

    Legend: . air, ~ water, s sand, d dirt, g grass, # stone.
    """

    def build(*rows: str) -> TerrainGrid:
        cells = np.array(
            [[BLOCK_CHARS[ch] for ch in row] for row in rows], dtype=np.uint8
        )
        return TerrainGrid.from_array(cells)

    return build


@pytest.fixture
def small_config() -> TerrainConfig:
    """120x60 world with a fixed island width."""
    return TerrainConfig.model_validate(
        {
            "seed": 7,
            "grid": {"columns": 120, "rows": 60},
            "elevation": {
                "mean_ground_row": 40,
                "mean_stone_row": 47,
                "ground_variation": 2,
                "stone_variation": 2,
                "noise": {"scale": 0.08},
            },
            "island": {
                "width_fraction": 0.7,
                "taper_width": 20,
                "shore_smoothing_width": 6,
            },
            "ocean": {
                "near_island_floor_row": 53,
                "near_island_stone_row": 56,
                "deep_floor_row": 56,
                "deep_stone_row": 59,
                "edge_taper_width": 12,
                "edge_floor_row": 59,
                "edge_stone_row": 600,
            },
            "water": {"level_fraction": 0.2},
            "shoreline": {"max_raise": 1, "max_depth": 2, "scan_rows_above": 10},
        }
    )


@pytest.fixture(scope="session")
def default_result() -> GenerationResult:
    """Terrain generated once from the default 400x200 config."""
    return generate_terrain(TerrainConfig())
