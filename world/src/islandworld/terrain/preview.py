"""Preview images of generated terrain."""

import numpy as np
from numpy.typing import NDArray
from PIL import Image

from ..block_types import BlockType
from ..grid import TerrainGrid

# Colors for each block type (RGB)
BLOCK_COLORS: dict[BlockType, tuple[int, int, int]] = {
    BlockType.AIR: (135, 206, 235),    # Sky blue
    BlockType.WATER: (30, 90, 200),    # Sea blue
    BlockType.SAND: (210, 180, 140),   # Tan
    BlockType.DIRT: (130, 82, 45),     # Brown
    BlockType.GRASS: (80, 180, 80),    # Green
    BlockType.STONE: (140, 140, 140),  # Gray
}


def _palette() -> NDArray[np.uint8]:
    """Lookup table from block value to RGB; unknown values are magenta."""
    table = np.tile(np.array([255, 0, 255], dtype=np.uint8), (256, 1))
    for block, color in BLOCK_COLORS.items():
        table[int(block)] = color
    return table


def render_image(grid: TerrainGrid, scale: int = 1) -> Image.Image:
    """Render the grid side-on, one scale x scale pixel block per cell.

    Args:
        grid: Terrain grid.
        scale: Pixels per cell edge.

    Returns:
        PIL RGB image of size (columns * scale, rows * scale).
    """
    if scale < 1:
        raise ValueError(f"scale must be >= 1, got {scale}")

    rgb = _palette()[grid.cells]
    if scale > 1:
        rgb = np.repeat(np.repeat(rgb, scale, axis=0), scale, axis=1)

    return Image.fromarray(rgb)
