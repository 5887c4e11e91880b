import logging
import operator
import random
from typing import Iterator, List, Optional, Tuple

import numpy as np

from maze_backtracker.core.cell import Cell, Direction, DELTA, OPPOSITE, DIRECTIONS
from maze_backtracker.core.errors import InvalidDimension

logger = logging.getLogger(__name__)


def check_dimensions(height, width) -> Tuple[int, int]:
    """
    Returns (height, width) as plain ints. Anything that is not an integer
    of at least 1 raises InvalidDimension; bools are refused.
    """
    sizes = []
    for name, value in (("height", height), ("width", width)):
        if isinstance(value, bool):
            raise InvalidDimension(name, value)
        try:
            size = operator.index(value)
        except TypeError:
            raise InvalidDimension(name, value) from None
        if size < 1:
            raise InvalidDimension(name, value)
        sizes.append(size)
    return sizes[0], sizes[1]


class Grid:
    __slots__ = ('height', 'width', 'cells')

    def __init__(self):
        # Empty until the first reinitialize()
        self.height = 0
        self.width = 0
        self.cells: List[Cell] = []

    def dimensions(self) -> Tuple[int, int]:
        return (self.height, self.width)

    def get_index(self, row: int, col: int) -> int:
        if 0 <= row < self.height and 0 <= col < self.width:
            return row * self.width + col
        raise IndexError(f"Coordinate ({row}, {col}) out of bounds")

    def cell_at(self, row: int, col: int) -> Cell:
        return self.cells[self.get_index(row, col)]

    def reinitialize(self, height: int, width: int, rng: random.Random):
        """
        Prepares a height x width grid with every cell fully walled.
        Cells are reused when the size is unchanged and reallocated otherwise.
        """
        height, width = check_dimensions(height, width)
        if (height, width) != (self.height, self.width):
            logger.debug(f"Allocating {height}x{width} grid (was {self.height}x{self.width})")
            self.height = height
            self.width = width
            self.cells = [Cell(r, c) for r in range(height) for c in range(width)]
        else:
            logger.debug(f"Reusing {height}x{width} grid")

        # Row-major order keeps the random draws reproducible
        for cell in self.cells:
            cell.reset(rng)

    def neighbor(self, cell: Cell, direction: Direction) -> Optional[Cell]:
        """
        Returns the adjacent cell in 'direction', or None off the edge.
        Does NOT check walls.
        """
        d_row, d_col = DELTA[direction]
        row, col = cell.row + d_row, cell.col + d_col
        if 0 <= row < self.height and 0 <= col < self.width:
            return self.cells[row * self.width + col]
        return None

    def carve(self, cell: Cell, direction: Direction) -> Optional[Cell]:
        """
        Removes the wall between 'cell' and its neighbor in 'direction'.
        Also removes the OPPOSITE wall from the neighbor.
        """
        other = self.neighbor(cell, direction)
        if other is None:
            return None  # Cannot carve into void
        cell.open_wall(direction)
        other.open_wall(OPPOSITE[direction])
        return other

    def open_neighbors(self, cell: Cell) -> Iterator[Cell]:
        """
        Yields neighbors that are NOT blocked by a wall.
        """
        for direction in DIRECTIONS:
            if not cell.has_wall(direction):
                other = self.neighbor(cell, direction)
                if other is not None:
                    yield other

    def rows(self) -> List[List[Cell]]:
        w = self.width
        return [self.cells[r * w:(r + 1) * w] for r in range(self.height)]

    def wall_array(self) -> np.ndarray:
        """
        Wall masks as a (height, width) uint8 array, for renderers.
        """
        arr = np.fromiter((cell.walls for cell in self.cells), dtype=np.uint8, count=len(self.cells))
        return arr.reshape((self.height, self.width))

    def __len__(self):
        return len(self.cells)

    def __iter__(self) -> Iterator[Cell]:
        return iter(self.cells)
