"""Procedural terrain generation package.

Builds the side-view island world: noise-driven height profiles,
landmass rasterization, sea flood fill and the sand shoreline.
"""

from .config import TerrainConfig, validate_config
from .generator import GenerationResult, generate, generate_terrain
from .noise import NoiseField
from .persistence import load_grid, save_grid
from .validation import ValidationResult, validate_terrain

__all__ = [
    "GenerationResult",
    "NoiseField",
    "TerrainConfig",
    "ValidationResult",
    "generate",
    "generate_terrain",
    "load_grid",
    "save_grid",
    "validate_config",
    "validate_terrain",
]
