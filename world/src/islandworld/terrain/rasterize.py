"""Landmass rasterization: height profiles to block columns."""

import numpy as np
from numpy.typing import NDArray

from ..block_types import BlockType
from ..grid import TerrainGrid
from .profile import HeightProfiles


def rasterize_island(
    row_index: NDArray[np.int64],
    surface: NDArray[np.int64],
    stone: NDArray[np.int64],
) -> NDArray[np.uint8]:
    """Block layers for island columns: Air, one Grass row, Dirt, Stone.

    Args:
        row_index: Row numbers as a (rows, 1) column vector.
        surface: Surface rows, shape (n,).
        stone: Stone rows, shape (n,).

    Returns:
        (rows, n) block array.
    """
    blocks = np.full((row_index.shape[0], surface.shape[0]), BlockType.AIR, dtype=np.uint8)
    blocks[row_index == surface] = BlockType.GRASS
    blocks[(row_index > surface) & (row_index < stone)] = BlockType.DIRT
    blocks[row_index >= stone] = BlockType.STONE
    return blocks


def rasterize_ocean(
    row_index: NDArray[np.int64],
    floor: NDArray[np.int64],
    stone: NDArray[np.int64],
    rows: int,
) -> NDArray[np.uint8]:
    """Block layers for ocean columns: Air, Sand floor, Stone.

    Stone is resolved before sand. A column whose stone row was tapered
    past the bottom of the grid gets no stone and is sand from the floor
    down to the last row.

    Args:
        row_index: Row numbers as a (rows, 1) column vector.
        floor: Floor rows, shape (n,).
        stone: Stone rows, shape (n,); values >= rows mean no stone.
        rows: Grid height.

    Returns:
        (rows, n) block array.
    """
    is_stone = (stone < rows) & (row_index >= stone)
    is_sand = ~is_stone & (row_index >= floor) & (row_index < stone)

    blocks = np.full(is_stone.shape, BlockType.AIR, dtype=np.uint8)
    blocks[is_sand] = BlockType.SAND
    blocks[is_stone] = BlockType.STONE
    return blocks


def rasterize_landmass(grid: TerrainGrid, profiles: HeightProfiles) -> None:
    """Write every column of the grid from its height profile.

    Overwrites all cells, so every cell holds a defined block afterwards.

    Args:
        grid: Grid to populate in place.
        profiles: Per-column target rows.
    """
    rows = grid.rows
    row_index = np.arange(rows, dtype=np.int64)[:, np.newaxis]
    ocean = profiles.is_ocean

    cells = grid.mutable_cells()
    cells[:, ~ocean] = rasterize_island(
        row_index, profiles.surface_rows[~ocean], profiles.stone_rows[~ocean]
    )
    cells[:, ocean] = rasterize_ocean(
        row_index, profiles.surface_rows[ocean], profiles.stone_rows[ocean], rows
    )
