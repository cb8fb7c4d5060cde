"""Main terrain generation orchestration."""

import logging
from pathlib import Path

import numpy as np

from ..block_types import BlockType
from ..exceptions import GenerationError
from ..grid import TerrainGrid
from .coastal import apply_sand_pass
from .config import TerrainConfig, validate_config
from .hydrology import flood_fill
from .island import IslandLayout, layout_island
from .noise import NoiseField
from .profile import HeightProfiles, compute_height_profiles
from .rasterize import rasterize_landmass

logger = logging.getLogger(__name__)


class GenerationResult:
    """Result of terrain generation with intermediate data."""

    def __init__(
        self,
        grid: TerrainGrid,
        config: TerrainConfig,
        layout: IslandLayout,
        profiles: HeightProfiles,
        water_cells: int,
        sand_cells: int,
    ):
        self.grid = grid
        self.config = config
        self.layout = layout
        self.profiles = profiles
        self.water_cells = water_cells
        self.sand_cells = sand_cells


def make_noise_field(config: TerrainConfig) -> NoiseField:
    """Build the height noise field for a config."""
    noise = config.elevation.noise
    return NoiseField(
        config.seed,
        octaves=noise.octaves,
        lacunarity=noise.lacunarity,
        gain=noise.gain,
    )


def generate_terrain(config: TerrainConfig) -> GenerationResult:
    """Generate complete terrain from configuration.

    Stages run in a fixed order (rasterize, flood fill, sand pass) on a grid
    owned by this call. The grid is only returned once every stage has
    finished; a failing stage drops it and raises.

    Args:
        config: Terrain generation configuration.

    Returns:
        GenerationResult with the populated grid and intermediates.

    Raises:
        ConfigurationError: If the configuration is invalid. Raised before
            any stage runs.
        GenerationError: If a stage fails.
    """
    validate_config(config)

    rng = np.random.default_rng(config.seed)
    columns, rows = config.grid.columns, config.grid.rows
    water_row = config.target_water_row

    logger.info(f"Generating terrain {columns}x{rows} with seed {config.seed}")

    try:
        grid = TerrainGrid(columns=columns, rows=rows)

        # Stage A: Height profiles
        logger.info("Stage A: Computing height profiles...")
        layout = layout_island(config, rng)
        noise = make_noise_field(config)
        profiles = compute_height_profiles(config, layout, noise)

        logger.info(
            f"Island columns [{layout.start_col}, {layout.end_col}) "
            f"({layout.width_fraction:.1%} of width)"
        )

        # Stage B: Landmass
        logger.info("Stage B: Rasterizing landmass...")
        rasterize_landmass(grid, profiles)

        # Stage C: Sea
        logger.info(f"Stage C: Flooding sea up to row {water_row}...")
        water_cells = flood_fill(grid, water_row)

        # Stage D: Shoreline
        logger.info("Stage D: Applying shoreline sand...")
        sand_cells = apply_sand_pass(grid, water_row, config.shoreline)
    except Exception as exc:
        raise GenerationError(f"Terrain generation failed: {exc}") from exc

    _log_terrain_stats(grid)

    # Debug output if enabled
    if config.debug_output_dir:
        _dump_debug_image(Path(config.debug_output_dir), grid)

    return GenerationResult(
        grid=grid,
        config=config,
        layout=layout,
        profiles=profiles,
        water_cells=water_cells,
        sand_cells=sand_cells,
    )


def generate(config: TerrainConfig) -> TerrainGrid:
    """Generate terrain and return the finished grid.

    Args:
        config: Terrain generation configuration.

    Returns:
        Fully populated TerrainGrid, owned by the caller.
    """
    return generate_terrain(config).grid


def _log_terrain_stats(grid: TerrainGrid) -> None:
    """Log terrain generation statistics."""
    total = grid.columns * grid.rows

    logger.info(f"Terrain stats ({total:,} cells):")
    for block in BlockType:
        count = grid.count(block)
        pct = count / total * 100
        logger.info(f"  {block.name.lower()}: {count:,} ({pct:.1f}%)")


def _dump_debug_image(output_dir: Path, grid: TerrainGrid) -> None:
    """Save a preview image of the grid for debugging."""
    from .preview import render_image

    output_dir.mkdir(parents=True, exist_ok=True)
    path = output_dir / "terrain.png"
    render_image(grid, scale=2).save(path)

    logger.info(f"Debug image saved to {path}")
