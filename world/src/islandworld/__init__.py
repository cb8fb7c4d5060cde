"""Island world terrain core."""

from .block_types import BlockType
from .exceptions import (
    ConfigurationError,
    GenerationError,
    OutOfBoundsError,
    WorldError,
)
from .grid import TerrainGrid
from .terrain import TerrainConfig, generate, generate_terrain

__all__ = [
    # Grid
    "BlockType",
    "TerrainGrid",
    # Generation
    "TerrainConfig",
    "generate",
    "generate_terrain",
    # Exceptions
    "WorldError",
    "ConfigurationError",
    "GenerationError",
    "OutOfBoundsError",
]
