"""Per-column height profiles combining island and ocean levels."""

from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray

from .config import TerrainConfig
from .island import IslandLayout, clamp_island_rows, island_heights
from .noise import NoiseField, lerp
from .ocean import ocean_heights


@dataclass(frozen=True)
class HeightProfiles:
    """Target rows for every column of the grid.

    For island columns ``surface_rows`` is the grass row; for ocean columns
    it is the top of the sand floor. ``stone_rows`` >= grid rows means the
    column has no stone.
    """

    surface_rows: NDArray[np.int64]
    stone_rows: NDArray[np.int64]
    is_ocean: NDArray[np.bool_]

    def column(self, col: int) -> tuple[int, int, bool]:
        """(surface_row, stone_row, is_ocean) for one column."""
        return (
            int(self.surface_rows[col]),
            int(self.stone_rows[col]),
            bool(self.is_ocean[col]),
        )


def compute_height_profiles(
    config: TerrainConfig,
    layout: IslandLayout,
    noise: NoiseField,
) -> HeightProfiles:
    """Compute surface and stone rows for every column.

    Each column's rows depend only on its index, the layout and the config;
    nothing carries over between columns.

    Args:
        config: Terrain generation configuration.
        layout: Island placement.
        noise: Height noise field.

    Returns:
        HeightProfiles covering all grid columns.
    """
    columns = config.grid.columns
    cols = np.arange(columns, dtype=np.int64)
    island = layout.island_mask(columns)

    surface = np.zeros(columns, dtype=np.int64)
    stone = np.zeros(columns, dtype=np.int64)

    surface[island], stone[island] = island_heights(cols[island], layout, noise, config)
    surface[~island], stone[~island] = ocean_heights(cols[~island], layout, config)

    surface, stone = smooth_shore(surface, stone, layout, config)

    return HeightProfiles(surface_rows=surface, stone_rows=stone, is_ocean=~island)


def smooth_shore(
    surface: NDArray[np.int64],
    stone: NDArray[np.int64],
    layout: IslandLayout,
    config: TerrainConfig,
) -> tuple[NDArray[np.int64], NDArray[np.int64]]:
    """Blend the outermost island columns toward the adjacent ocean column.

    The i-th column in from either island edge moves (i + 1) / (width + 1)
    of the way from the neighbouring ocean column's rows back to its own.
    The reference rows are read before any column is changed.

    Args:
        surface: Surface/floor rows for all columns.
        stone: Stone rows for all columns.
        layout: Island placement.
        config: Terrain generation configuration.

    Returns:
        New (surface, stone) arrays.
    """
    width = config.island.shore_smoothing_width
    columns = config.grid.columns
    if width <= 0:
        return surface, stone

    surface = surface.copy()
    stone = stone.copy()
    steps = np.arange(min(width, layout.width))
    blend = (steps + 1) / (width + 1)

    sides = []
    if layout.start_col - 1 >= 0:
        sides.append((layout.start_col + steps, layout.start_col - 1))
    if layout.end_col < columns:
        sides.append((layout.end_col - 1 - steps, layout.end_col))

    # Read all references first so one side never sees the other's result
    references = [(cols, surface[ref], stone[ref]) for cols, ref in sides]
    originals = [(surface[cols], stone[cols]) for cols, _ in sides]

    for (cols, ref_surface, ref_stone), (own_surface, own_stone) in zip(references, originals):
        new_surface = np.rint(lerp(blend, ref_surface, own_surface)).astype(np.int64)
        new_stone = np.rint(lerp(blend, ref_stone, own_stone)).astype(np.int64)
        surface[cols], stone[cols] = clamp_island_rows(
            new_surface, new_stone, config.grid.rows
        )

    return surface, stone
