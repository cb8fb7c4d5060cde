"""Grid storage for generated terrain."""

import numpy as np
import structlog
from numpy.typing import NDArray
from pydantic import BaseModel, PrivateAttr

from .block_types import BlockType
from .exceptions import OutOfBoundsError

logger = structlog.get_logger()


class TerrainGrid(BaseModel):
    """
    Mutable columns x rows block grid.

    Row 0 is the top of the world; rows increase downward.
    Cells are stored in a dense uint8 array of shape (rows, columns),
    values are BlockType members.
    """

    columns: int
    rows: int

    _cells: NDArray[np.uint8] = PrivateAttr()

    def model_post_init(self, __context: object) -> None:
        self._cells = np.full(
            (self.rows, self.columns), BlockType.AIR, dtype=np.uint8
        )

    @classmethod
    def from_array(cls, cells: NDArray[np.uint8]) -> "TerrainGrid":
        """Wrap an existing (rows, columns) block array.

        Raises:
            ValueError: If the array is not 2D or holds unknown block values.
        """
        if cells.ndim != 2:
            raise ValueError(f"Expected 2D block array, got shape {cells.shape}")
        known = np.isin(cells, [int(b) for b in BlockType])
        if not np.all(known):
            raise ValueError(
                f"Block array holds {int(np.sum(~known))} unknown block values"
            )
        rows, columns = cells.shape
        grid = cls(columns=columns, rows=rows)
        grid._cells = cells.astype(np.uint8, copy=True)
        return grid

    @property
    def cells(self) -> NDArray[np.uint8]:
        """Read-only view of the backing array, indexed [row, col]."""
        view = self._cells.view()
        view.flags.writeable = False
        return view

    def mutable_cells(self) -> NDArray[np.uint8]:
        """Writable backing array for bulk generation stages.

        Writes bypass the bounds and block checks of set_block.
        """
        return self._cells

    # --- Cell operations ---

    def in_bounds(self, col: int, row: int) -> bool:
        """Check if (col, row) lies inside the grid."""
        return 0 <= col < self.columns and 0 <= row < self.rows

    def get_block_type(self, col: int, row: int) -> BlockType:
        """Get the block at (col, row).

        Raises:
            OutOfBoundsError: If the cell is outside the grid.
        """
        if not self.in_bounds(col, row):
            raise OutOfBoundsError(
                f"Cell ({col}, {row}) outside {self.columns}x{self.rows} grid"
            )
        return BlockType(int(self._cells[row, col]))

    def set_block(self, col: int, row: int, block_type: BlockType) -> None:
        """Replace the block at (col, row).

        Raises:
            OutOfBoundsError: If the cell is outside the grid.
        """
        if not self.in_bounds(col, row):
            logger.debug("set_block_rejected_oob", col=col, row=row)
            raise OutOfBoundsError(
                f"Cell ({col}, {row}) outside {self.columns}x{self.rows} grid"
            )
        block = BlockType(block_type)
        previous = BlockType(int(self._cells[row, col]))
        self._cells[row, col] = block
        logger.debug(
            "block_set",
            col=col,
            row=row,
            previous=previous.name,
            block=block.name,
        )

    def count(self, block_type: BlockType) -> int:
        """Number of cells holding block_type."""
        return int(np.count_nonzero(self._cells == block_type))

    def copy(self) -> "TerrainGrid":
        """Deep copy of the grid."""
        return TerrainGrid.from_array(self._cells)
