"""Island zone layout and island column heights."""

import math
from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray

from .config import TerrainConfig
from .noise import NoiseField, lerp

# Minimum dirt rows between surface and stone before tapering
BASE_STONE_GAP = 3

# Easing exponent for the island edge taper (<1 drops faster near the edge)
ISLAND_TAPER_EXPONENT = 0.75


@dataclass(frozen=True)
class IslandLayout:
    """Half-open column range [start_col, end_col) holding the island."""

    start_col: int
    end_col: int
    width_fraction: float

    @property
    def width(self) -> int:
        return self.end_col - self.start_col

    def island_mask(self, columns: int) -> NDArray[np.bool_]:
        """Boolean mask over columns where True = island."""
        cols = np.arange(columns)
        return (cols >= self.start_col) & (cols < self.end_col)

    def distance_to_edge(self, cols: NDArray[np.int64]) -> NDArray[np.int64]:
        """Distance from island columns to the nearer island edge column."""
        return np.minimum(cols - self.start_col, (self.end_col - 1) - cols)


def layout_island(config: TerrainConfig, rng: np.random.Generator) -> IslandLayout:
    """Place the island centered in the grid.

    Args:
        config: Terrain generation configuration.
        rng: Seeded generator; consumed only when width jitter is enabled.

    Returns:
        IslandLayout for this run.
    """
    fraction = config.island.width_fraction
    if config.island.width_jitter > 0:
        jitter = config.island.width_jitter
        fraction += float(rng.uniform(-jitter, jitter))

    columns = config.grid.columns
    width = math.floor(columns * fraction)
    start_col = (columns - width) // 2
    return IslandLayout(
        start_col=start_col, end_col=start_col + width, width_fraction=fraction
    )


def base_surface_rows(
    cols: NDArray[np.int64],
    noise: NoiseField,
    config: TerrainConfig,
) -> NDArray[np.int64]:
    """Noise-only surface rows: mean + round(noise(c * scale) * variation)."""
    elevation = config.elevation
    signal = noise.noise(cols * elevation.noise.scale)
    return elevation.mean_ground_row + np.rint(
        signal * elevation.ground_variation
    ).astype(np.int64)


def base_stone_rows(
    cols: NDArray[np.int64],
    noise: NoiseField,
    config: TerrainConfig,
) -> NDArray[np.int64]:
    """Noise-only stone rows, sampled at a lower frequency with a phase offset."""
    elevation = config.elevation
    x = (
        cols * elevation.noise.scale * elevation.noise.stone_scale_factor
        + elevation.noise.stone_phase
    )
    signal = noise.noise(x)
    return elevation.mean_stone_row + np.rint(
        signal * elevation.stone_variation
    ).astype(np.int64)


def clamp_island_rows(
    surface: NDArray[np.int64],
    stone: NDArray[np.int64],
    rows: int,
) -> tuple[NDArray[np.int64], NDArray[np.int64]]:
    """Clamp island rows into the grid keeping stone below surface.

    Surface stops at rows - 2 so a stone row always fits underneath.

    Returns:
        (surface, stone) with 0 <= surface < stone < rows.
    """
    surface = np.clip(surface, 0, rows - 2)
    stone = np.maximum(stone, surface + 1)
    stone = np.clip(stone, surface + 1, rows - 1)
    return surface, stone


def island_heights(
    cols: NDArray[np.int64],
    layout: IslandLayout,
    noise: NoiseField,
    config: TerrainConfig,
) -> tuple[NDArray[np.int64], NDArray[np.int64]]:
    """Compute surface and stone rows for island columns.

    Columns within ``island.taper_width`` of an island edge are eased toward
    the near-island ocean levels, so the landmass slopes into the sea.

    Args:
        cols: Island column indices.
        layout: Island placement.
        noise: Height noise field.
        config: Terrain generation configuration.

    Returns:
        Tuple of (surface_rows, stone_rows), clamped into the grid.
    """
    surface = base_surface_rows(cols, noise, config)
    stone = base_stone_rows(cols, noise, config)
    stone = np.maximum(stone, surface + BASE_STONE_GAP)

    taper_width = config.island.taper_width
    if taper_width > 0:
        dist = layout.distance_to_edge(cols)
        tapered = dist < taper_width
        blend = (dist[tapered] / taper_width) ** ISLAND_TAPER_EXPONENT

        ocean = config.ocean
        surface = surface.copy()
        stone = stone.copy()
        surface[tapered] = np.rint(
            lerp(blend, ocean.near_island_floor_row, surface[tapered])
        ).astype(np.int64)
        stone[tapered] = np.rint(
            lerp(blend, ocean.near_island_stone_row, stone[tapered])
        ).astype(np.int64)

    return clamp_island_rows(surface, stone, config.grid.rows)
