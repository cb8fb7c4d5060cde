"""Ocean column floor and stone levels."""

import numpy as np
from numpy.typing import NDArray

from .config import TerrainConfig
from .island import IslandLayout
from .noise import lerp

# Easing exponent for the map edge taper
EDGE_TAPER_EXPONENT = 0.5


def distance_from_island(
    cols: NDArray[np.int64],
    layout: IslandLayout,
) -> NDArray[np.int64]:
    """Columns between each ocean column and the island (1 = adjacent)."""
    return np.where(
        cols < layout.start_col,
        layout.start_col - cols,
        cols - (layout.end_col - 1),
    )


def ocean_heights(
    cols: NDArray[np.int64],
    layout: IslandLayout,
    config: TerrainConfig,
) -> tuple[NDArray[np.int64], NDArray[np.int64]]:
    """Compute floor and stone rows for ocean columns.

    Levels first shelve from the near-island targets down to the deep
    ocean over ``ocean.transition_fraction`` of the island's start column,
    then taper toward the edge targets within ``ocean.edge_taper_width``
    of either map edge. The edge stone target lies far below the grid, so
    the stone layer fades out before the map edge.

    Args:
        cols: Ocean column indices.
        layout: Island placement.
        config: Terrain generation configuration.

    Returns:
        Tuple of (floor_rows, stone_rows). Floor rows lie in [0, rows);
        stone rows are capped at rows, which means the column has no stone.
    """
    ocean = config.ocean
    columns, rows = config.grid.columns, config.grid.rows

    floor = np.full(cols.shape, ocean.deep_floor_row, dtype=np.int64)
    stone = np.full(cols.shape, ocean.deep_stone_row, dtype=np.int64)

    # Stage 1: near-island shelf to deep ocean
    dist = distance_from_island(cols, layout)
    transition_width = layout.start_col * ocean.transition_fraction
    if transition_width > 0:
        shelf = (dist > 0) & (dist < transition_width)
        deep_blend = np.minimum(1.0, dist[shelf] / transition_width)
        floor[shelf] = np.rint(
            lerp(deep_blend, ocean.near_island_floor_row, ocean.deep_floor_row)
        ).astype(np.int64)
        stone[shelf] = np.rint(
            lerp(deep_blend, ocean.near_island_stone_row, ocean.deep_stone_row)
        ).astype(np.int64)

    # Stage 2: taper toward the off-map edge targets
    edge_width = ocean.edge_taper_width
    if edge_width > 0:
        edge_dist = np.minimum(cols, (columns - 1) - cols)
        near_edge = edge_dist < edge_width
        edge_blend = np.minimum(1.0, edge_dist[near_edge] / edge_width) ** EDGE_TAPER_EXPONENT
        floor[near_edge] = np.rint(
            lerp(edge_blend, ocean.edge_floor_row, floor[near_edge])
        ).astype(np.int64)
        stone[near_edge] = np.rint(
            lerp(edge_blend, ocean.edge_stone_row, stone[near_edge])
        ).astype(np.int64)

    floor = np.clip(floor, 0, rows - 1)
    stone = np.clip(stone, 0, rows)
    on_map = stone < rows
    stone[on_map] = np.maximum(stone[on_map], floor[on_map] + 1)

    return floor, stone
