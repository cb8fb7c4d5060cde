"""Terrain generation configuration models.

Row values are absolute row indices for the configured grid (row 0 is the
top of the world). Defaults describe a 400x200 world.
"""

import math

from pydantic import BaseModel, Field

from ..exceptions import ConfigurationError


class GridConfig(BaseModel):
    """World grid dimensions."""

    columns: int = Field(default=400, description="Grid width in cells")
    rows: int = Field(default=200, description="Grid height in cells")


class NoiseConfig(BaseModel):
    """1D noise parameters for surface and stone height signals."""

    scale: float = Field(default=0.05, description="Noise input units per column")
    octaves: int = Field(default=1, description="Number of octaves for fBm")
    lacunarity: float = Field(default=2.0, description="Frequency multiplier per octave")
    gain: float = Field(default=0.5, description="Amplitude multiplier per octave")
    stone_scale_factor: float = Field(
        default=0.5, description="Frequency of the stone signal relative to surface"
    )
    stone_phase: float = Field(
        default=100.0, description="Input offset decorrelating stone from surface"
    )


class ElevationConfig(BaseModel):
    """Island height levels."""

    mean_ground_row: int = Field(default=150, description="Noise-free surface row")
    mean_stone_row: int = Field(default=165, description="Noise-free top of stone row")
    ground_variation: int = Field(default=3, description="Surface noise amplitude in rows")
    stone_variation: int = Field(default=3, description="Stone noise amplitude in rows")
    noise: NoiseConfig = Field(default_factory=NoiseConfig)


class IslandConfig(BaseModel):
    """Island zone shaping parameters."""

    width_fraction: float = Field(
        default=0.8, description="Island width as a fraction of grid columns"
    )
    width_jitter: float = Field(
        default=0.0, description="Seeded random +/- variation of width_fraction"
    )
    taper_width: int = Field(
        default=80, description="Columns inside the island edge blended toward ocean levels"
    )
    shore_smoothing_width: int = Field(
        default=20, description="Island columns blended toward the adjacent ocean column"
    )


class OceanConfig(BaseModel):
    """Ocean floor and stone target rows."""

    near_island_floor_row: int = Field(default=175, description="Floor row next to the island")
    near_island_stone_row: int = Field(default=183, description="Stone row next to the island")
    deep_floor_row: int = Field(default=190, description="Deep ocean floor row")
    deep_stone_row: int = Field(default=198, description="Deep ocean stone row")
    transition_fraction: float = Field(
        default=0.5,
        description="Shelf width to the deep ocean as a fraction of the island start column",
    )
    edge_taper_width: int = Field(
        default=40, description="Columns from each map edge tapered toward edge targets"
    )
    edge_floor_row: int = Field(
        default=200, description="Floor target at the map edge (deep floor + 10)"
    )
    edge_stone_row: int = Field(
        default=2000, description="Stone target at the map edge, far below the grid"
    )


class WaterConfig(BaseModel):
    """Sea level."""

    level_fraction: float = Field(
        default=0.15, description="Fraction of grid rows (from the bottom) under water"
    )

    def target_row(self, rows: int) -> int:
        """Highest row index that water may occupy."""
        return math.floor(rows * (1.0 - self.level_fraction))


class ShorelineConfig(BaseModel):
    """Sand shoreline pass parameters."""

    max_raise: int = Field(default=1, description="Rows above water level sand may appear")
    max_depth: int = Field(default=3, description="Rows sand propagates below a shore cell")
    scan_rows_above: int = Field(
        default=30, description="Rows above water level included in the shore scan"
    )


class TerrainConfig(BaseModel):
    """Complete terrain generation configuration."""

    seed: int = Field(default=42, description="Random seed for reproducibility")

    grid: GridConfig = Field(default_factory=GridConfig)
    elevation: ElevationConfig = Field(default_factory=ElevationConfig)
    island: IslandConfig = Field(default_factory=IslandConfig)
    ocean: OceanConfig = Field(default_factory=OceanConfig)
    water: WaterConfig = Field(default_factory=WaterConfig)
    shoreline: ShorelineConfig = Field(default_factory=ShorelineConfig)

    # Debug options
    debug_output_dir: str | None = Field(
        default=None, description="Directory for debug images (None = disabled)"
    )

    @property
    def target_water_row(self) -> int:
        """Water surface row for this grid."""
        return self.water.target_row(self.grid.rows)


def min_island_start_col(config: TerrainConfig) -> int:
    """Leftmost island start column any seed can produce."""
    widest = min(config.island.width_fraction + config.island.width_jitter, 1.0)
    width = math.floor(config.grid.columns * widest)
    return (config.grid.columns - width) // 2


def validate_config(config: TerrainConfig) -> None:
    """Check generation constants for contradictions.

    Args:
        config: Terrain generation configuration.

    Raises:
        ConfigurationError: On the first invalid or contradictory value.
    """
    columns, rows = config.grid.columns, config.grid.rows
    if columns < 3 or rows < 3:
        raise ConfigurationError(f"Grid {columns}x{rows} is too small (min 3x3)")

    island = config.island
    if island.width_jitter < 0:
        raise ConfigurationError(f"Negative island width jitter {island.width_jitter}")
    narrowest = island.width_fraction - island.width_jitter
    widest = island.width_fraction + island.width_jitter
    if narrowest <= 0 or widest >= 1:
        raise ConfigurationError(
            f"Island width fraction range [{narrowest:.3f}, {widest:.3f}] "
            "must lie strictly inside (0, 1)"
        )
    min_width = math.floor(columns * narrowest)
    if min_width < 1:
        raise ConfigurationError(f"Island narrower than one column ({narrowest:.3f})")

    if island.taper_width < 0:
        raise ConfigurationError(f"Negative island taper width {island.taper_width}")
    if island.taper_width * 2 > min_width:
        raise ConfigurationError(
            f"Island taper width {island.taper_width} exceeds half the "
            f"narrowest island ({min_width} columns)"
        )
    if island.shore_smoothing_width < 0:
        raise ConfigurationError(
            f"Negative shore smoothing width {island.shore_smoothing_width}"
        )
    if island.shore_smoothing_width > island.taper_width:
        raise ConfigurationError(
            f"Shore smoothing width {island.shore_smoothing_width} exceeds "
            f"island taper width {island.taper_width}"
        )

    elevation = config.elevation
    for name in ("mean_ground_row", "mean_stone_row"):
        value = getattr(elevation, name)
        if not 0 <= value < rows:
            raise ConfigurationError(f"elevation.{name}={value} outside [0, {rows})")
    if elevation.mean_stone_row <= elevation.mean_ground_row:
        raise ConfigurationError(
            f"Mean stone row {elevation.mean_stone_row} must be below "
            f"mean ground row {elevation.mean_ground_row}"
        )
    if elevation.ground_variation < 0 or elevation.stone_variation < 0:
        raise ConfigurationError("Height variations must be non-negative")
    if elevation.noise.octaves < 1:
        raise ConfigurationError(f"Noise octaves must be >= 1, got {elevation.noise.octaves}")
    if elevation.noise.scale <= 0:
        raise ConfigurationError(f"Noise scale must be positive, got {elevation.noise.scale}")

    ocean = config.ocean
    for name in ("near_island_floor_row", "near_island_stone_row", "deep_floor_row", "edge_floor_row"):
        value = getattr(ocean, name)
        if value < 0:
            raise ConfigurationError(f"ocean.{name}={value} is negative")
    if ocean.near_island_stone_row <= ocean.near_island_floor_row:
        raise ConfigurationError("Near-island stone row must be below the floor row")
    if ocean.deep_stone_row <= ocean.deep_floor_row:
        raise ConfigurationError("Deep ocean stone row must be below the floor row")
    if ocean.transition_fraction < 0:
        raise ConfigurationError(
            f"Negative ocean transition fraction {ocean.transition_fraction}"
        )
    if ocean.edge_stone_row < rows:
        raise ConfigurationError(
            f"Edge stone target {ocean.edge_stone_row} must lie below the grid ({rows} rows)"
        )
    if ocean.edge_taper_width < 0:
        raise ConfigurationError(f"Negative edge taper width {ocean.edge_taper_width}")
    if ocean.edge_taper_width > min_island_start_col(config):
        raise ConfigurationError(
            f"Edge taper width {ocean.edge_taper_width} reaches into the island "
            f"(island may start at column {min_island_start_col(config)})"
        )

    if not 0 < config.water.level_fraction < 1:
        raise ConfigurationError(
            f"Water level fraction {config.water.level_fraction} outside (0, 1)"
        )

    shoreline = config.shoreline
    if shoreline.max_raise < 0 or shoreline.max_depth < 0 or shoreline.scan_rows_above < 0:
        raise ConfigurationError("Shoreline max_raise, max_depth and scan window must be >= 0")
