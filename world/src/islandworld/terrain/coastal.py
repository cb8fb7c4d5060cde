"""Coastal refinement: sand shoreline along the flooded sea."""

import logging

import numpy as np
from numpy.typing import NDArray
from scipy import ndimage

from ..block_types import LAND_TYPES, BlockType
from ..grid import TerrainGrid
from .config import ShorelineConfig

logger = logging.getLogger(__name__)

# 3x3 kernel counting the 8 neighbours, excluding the center
NEIGHBOR_KERNEL = np.array([[1, 1, 1], [1, 0, 1], [1, 1, 1]], dtype=np.int32)

# Blocks sand may extend down into below a shore cell
SINKABLE_TYPES = frozenset({BlockType.DIRT, BlockType.STONE})


def water_neighbor_count(cells: NDArray[np.uint8]) -> NDArray[np.int32]:
    """Count water cells among each cell's 8 neighbours.

    Cells outside the grid count as not water.
    """
    water = (cells == BlockType.WATER).astype(np.int32)
    return ndimage.convolve(water, NEIGHBOR_KERNEL, mode="constant", cval=0)


def detect_shore_cells(
    cells: NDArray[np.uint8],
    water_row: int,
    config: ShorelineConfig,
) -> set[tuple[int, int]]:
    """Phase A: find land cells touching water near the water line.

    Args:
        cells: Block array, indexed [row, col].
        water_row: Nominal water surface row.
        config: Shoreline parameters.

    Returns:
        Set of (col, row) sand candidates.
    """
    rows = cells.shape[0]
    top = max(0, water_row - config.scan_rows_above, water_row - config.max_raise)

    window = np.zeros(cells.shape, dtype=bool)
    window[top:rows, :] = True

    land = np.isin(cells, [int(b) for b in LAND_TYPES])
    shore = land & window & (water_neighbor_count(cells) > 0)

    shore_rows, shore_cols = np.nonzero(shore)
    return {(int(c), int(r)) for r, c in zip(shore_rows, shore_cols)}


def propagate_sand(
    cells: NDArray[np.uint8],
    shore: set[tuple[int, int]],
    max_depth: int,
) -> set[tuple[int, int]]:
    """Phase B: extend shore cells downward into dirt and stone.

    A cell is added only when it is dirt or stone and the cell directly
    above it is already recorded. Reads the pre-pass block array only.

    Args:
        cells: Block array, indexed [row, col].
        shore: Phase A candidates as (col, row).
        max_depth: Maximum rows walked below each candidate.

    Returns:
        All cells to convert: the candidates plus the propagated cells.
    """
    rows = cells.shape[0]
    recorded = set(shore)

    for col, row in sorted(shore):
        for depth in range(1, max_depth + 1):
            below = row + depth
            if below >= rows:
                break
            if (col, below - 1) not in recorded:
                break
            if BlockType(int(cells[below, col])) not in SINKABLE_TYPES:
                break
            recorded.add((col, below))

    return recorded


def apply_sand_pass(
    grid: TerrainGrid,
    water_row: int,
    config: ShorelineConfig,
) -> int:
    """Turn land bordering the sea into sand.

    Detection and propagation both work from the grid as it was before the
    pass; every conversion is committed together at the end, so the result
    does not depend on scan order.

    Args:
        grid: Grid to modify in place.
        water_row: Nominal water surface row.
        config: Shoreline parameters.

    Returns:
        Number of cells converted to sand.
    """
    cells = grid.mutable_cells()

    shore = detect_shore_cells(cells, water_row, config)
    converted = propagate_sand(cells, shore, config.max_depth)

    logger.debug(
        f"Sand pass: {len(shore)} shore cells, "
        f"{len(converted) - len(shore)} propagated below"
    )

    if converted:
        cols, rows = zip(*converted)
        cells[np.array(rows), np.array(cols)] = BlockType.SAND

    logger.info(f"Sand pass complete: {len(converted):,} sand cells")
    return len(converted)
