"""Block types stored in the world grid and their properties."""

from enum import IntEnum


class BlockType(IntEnum):
    """Cell contents, stored as uint8 values in the grid array."""

    AIR = 0
    WATER = 1
    SAND = 2
    DIRT = 3
    GRASS = 4
    STONE = 5

    @property
    def solid(self) -> bool:
        """Whether this block occupies its cell for collision."""
        return self in _SOLID_TYPES

    @property
    def liquid(self) -> bool:
        """Whether this block flows (water)."""
        return self in _LIQUID_TYPES

    @property
    def land(self) -> bool:
        """Whether the shoreline pass may turn this block into sand."""
        return self in LAND_TYPES


# Define sets for O(1) lookup
_SOLID_TYPES = frozenset({
    BlockType.SAND,
    BlockType.DIRT,
    BlockType.GRASS,
    BlockType.STONE,
})

_LIQUID_TYPES = frozenset({
    BlockType.WATER,
})

LAND_TYPES = frozenset({
    BlockType.DIRT,
    BlockType.GRASS,
    BlockType.STONE,
})
