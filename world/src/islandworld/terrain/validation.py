"""Post-generation validation of terrain invariants."""

import logging

import numpy as np

from ..block_types import BlockType
from ..grid import TerrainGrid
from .config import TerrainConfig
from .island import IslandLayout
from .profile import HeightProfiles

logger = logging.getLogger(__name__)


class ValidationResult:
    """Result of terrain validation."""

    def __init__(self) -> None:
        self.errors: list[str] = []
        self.warnings: list[str] = []
        self.passed = True

    def add_error(self, message: str) -> None:
        """Add validation error."""
        self.errors.append(message)
        self.passed = False

    def add_warning(self, message: str) -> None:
        """Add validation warning."""
        self.warnings.append(message)


def validate_terrain(
    grid: TerrainGrid,
    config: TerrainConfig,
    layout: IslandLayout,
    profiles: HeightProfiles,
) -> ValidationResult:
    """Validate generated terrain against constraints.

    Args:
        grid: Generated grid.
        config: Generation configuration.
        layout: Island placement used for the run.
        profiles: Height profiles used for the run.

    Returns:
        ValidationResult with any errors/warnings.
    """
    result = ValidationResult()

    # Check 1: Every cell is a known block
    _check_defined_cells(grid, result)

    # Check 2: No water above the water line
    _check_water_line(grid, config.target_water_row, result)

    # Check 3: Island layering
    _check_island_profiles(profiles, layout, grid.rows, result)

    # Check 4: Stone tapered away at the map edges
    _check_edge_stone(grid, config.ocean.edge_taper_width, result)

    # Check 5: Both land and sea present
    _check_land_and_water(grid, result)

    # Log results
    if result.passed:
        logger.info("Terrain validation passed")
    else:
        logger.warning(f"Terrain validation failed with {len(result.errors)} errors")
        for error in result.errors:
            logger.error(f"  - {error}")

    for warning in result.warnings:
        logger.warning(f"  - {warning}")

    return result


def _check_defined_cells(grid: TerrainGrid, result: ValidationResult) -> None:
    """Check that every cell holds a BlockType value."""
    known = np.isin(grid.cells, [int(b) for b in BlockType])
    undefined = int(np.sum(~known))
    if undefined > 0:
        result.add_error(f"{undefined} cells hold no block type")


def _check_water_line(
    grid: TerrainGrid,
    water_row: int,
    result: ValidationResult,
) -> None:
    """Check that no water sits above the water row."""
    above = grid.cells[: max(water_row, 0), :]
    count = int(np.sum(above == BlockType.WATER))
    if count > 0:
        result.add_error(f"{count} water cells above water row {water_row}")


def _check_island_profiles(
    profiles: HeightProfiles,
    layout: IslandLayout,
    rows: int,
    result: ValidationResult,
) -> None:
    """Check island columns keep stone below surface inside the grid."""
    island = ~profiles.is_ocean
    surface = profiles.surface_rows[island]
    stone = profiles.stone_rows[island]

    inverted = int(np.sum(stone < surface + 1))
    if inverted > 0:
        result.add_error(f"{inverted} island columns have stone at or above surface")

    outside = int(np.sum((surface < 0) | (surface >= rows) | (stone < 0) | (stone >= rows)))
    if outside > 0:
        result.add_error(f"{outside} island columns have rows outside the grid")

    if int(np.sum(island)) != layout.width:
        result.add_error(
            f"Island mask covers {int(np.sum(island))} columns, layout says {layout.width}"
        )


def _check_edge_stone(
    grid: TerrainGrid,
    edge_taper_width: int,
    result: ValidationResult,
) -> None:
    """Check the outermost edge columns hold no stone."""
    if edge_taper_width <= 0:
        return

    left = grid.cells[:, :edge_taper_width]
    right = grid.cells[:, grid.columns - edge_taper_width:]
    count = int(np.sum(left == BlockType.STONE) + np.sum(right == BlockType.STONE))
    if count > 0:
        result.add_warning(f"{count} stone cells inside the edge taper zone")


def _check_land_and_water(grid: TerrainGrid, result: ValidationResult) -> None:
    """Check the grid has both a landmass and a sea."""
    if grid.count(BlockType.WATER) == 0:
        result.add_warning("No water found")
    if grid.count(BlockType.GRASS) == 0:
        result.add_warning("No grass surface found")
