"""Hydrology: sea flood fill from the map boundary."""

import logging
from collections import deque

import numpy as np

from ..block_types import BlockType
from ..grid import TerrainGrid

logger = logging.getLogger(__name__)

# 4-connected neighbours as (d_col, d_row): up, down, left, right
AXIS_NEIGHBORS: tuple[tuple[int, int], ...] = ((0, -1), (0, 1), (-1, 0), (1, 0))


def flood_fill(grid: TerrainGrid, target_water_row: int) -> int:
    """Fill boundary-connected air at or below the water row with water.

    Breadth-first search seeded from every air cell in the bottom row and
    every air cell in the first and last columns at or below
    ``target_water_row``. Air enclosed by solid blocks is unreachable from
    those seeds and stays air (caves). Running it again on a filled grid
    converts nothing.

    Args:
        grid: Grid to modify in place.
        target_water_row: Highest (smallest) row index water may occupy.

    Returns:
        Number of cells converted to water.
    """
    cells = grid.mutable_cells()
    rows, columns = cells.shape
    air = int(BlockType.AIR)

    # Marked at enqueue time so no cell is queued twice
    visited = np.zeros((rows, columns), dtype=bool)
    queue: deque[tuple[int, int]] = deque()

    def enqueue(col: int, row: int) -> None:
        if (
            0 <= col < columns
            and target_water_row <= row < rows
            and not visited[row, col]
            and cells[row, col] == air
        ):
            visited[row, col] = True
            queue.append((col, row))

    # Seeds: bottom row, then both side columns below the water line
    bottom = rows - 1
    if bottom >= target_water_row:
        for col in range(columns):
            enqueue(col, bottom)
    for row in range(max(target_water_row, 0), rows):
        enqueue(0, row)
        enqueue(columns - 1, row)

    logger.debug(f"Flood fill seeded with {len(queue)} cells")

    filled = 0
    while queue:
        col, row = queue.popleft()

        # A queued cell may have changed since it was queued
        if not (0 <= col < columns and target_water_row <= row < rows):
            continue
        if cells[row, col] != air:
            continue

        cells[row, col] = BlockType.WATER
        filled += 1

        for d_col, d_row in AXIS_NEIGHBORS:
            enqueue(col + d_col, row + d_row)

    logger.info(f"Flood fill complete: {filled:,} water cells (water row {target_water_row})")
    return filled
