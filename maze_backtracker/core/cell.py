import random
from enum import IntFlag
from typing import Dict, List, Optional, Tuple


class Direction(IntFlag):
    # Bitmask values double as wall bits
    NORTH = 0b0001
    EAST  = 0b0010
    SOUTH = 0b0100
    WEST  = 0b1000


DIRECTIONS = (Direction.NORTH, Direction.EAST, Direction.SOUTH, Direction.WEST)

# (d_row, d_col)
DELTA: Dict[Direction, Tuple[int, int]] = {
    Direction.NORTH: (-1, 0),
    Direction.EAST: (0, 1),
    Direction.SOUTH: (1, 0),
    Direction.WEST: (0, -1),
}

OPPOSITE: Dict[Direction, Direction] = {
    Direction.NORTH: Direction.SOUTH,
    Direction.SOUTH: Direction.NORTH,
    Direction.EAST: Direction.WEST,
    Direction.WEST: Direction.EAST,
}


class Cell:
    # All walls present (N|E|S|W) = 15
    ALL_WALLS = 0b1111

    __slots__ = ('_row', '_col', 'walls', '_directions', '_cursor')

    def __init__(self, row: int, col: int):
        self._row = row
        self._col = col
        self.walls = self.ALL_WALLS
        self._directions: List[Direction] = list(DIRECTIONS)
        self._cursor = -1

    @property
    def row(self) -> int:
        return self._row

    @property
    def col(self) -> int:
        return self._col

    @property
    def position(self) -> Tuple[int, int]:
        return (self._row, self._col)

    def reset(self, rng: random.Random):
        """
        Closes every wall and draws a fresh trial order for the four directions.
        The order is restored to N, E, S, W before shuffling so it depends only
        on the state of `rng`.
        """
        self.walls = self.ALL_WALLS
        self._directions[:] = DIRECTIONS
        rng.shuffle(self._directions)
        self._cursor = -1

    def next_candidate_direction(self) -> Optional[Direction]:
        """
        Returns the next untried direction, or None once all four are used up.
        """
        if self._cursor >= 3:
            return None
        self._cursor += 1
        return self._directions[self._cursor]

    def open_wall(self, direction: Direction):
        # Only this side. Grid.carve handles the neighbor.
        self.walls &= ~int(direction)

    def has_wall(self, direction: Direction) -> bool:
        return (self.walls & direction) != 0

    def is_closed(self) -> bool:
        return self.walls == self.ALL_WALLS

    def wall_count(self) -> int:
        return bin(self.walls).count("1")

    def __repr__(self):
        return f"Cell(row={self._row}, col={self._col}, walls={self.walls:04b})"
