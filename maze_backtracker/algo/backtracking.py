import logging
import random
from enum import Enum
from typing import Iterator, List, Optional

from maze_backtracker.core.cell import Cell
from maze_backtracker.core.grid import Grid
from maze_backtracker.algo.base import MazeGenerator

logger = logging.getLogger(__name__)


class GeneratorState(Enum):
    IDLE = "idle"
    TRAVERSING = "traversing"
    DONE = "done"


class IterativeBacktracker(MazeGenerator):
    """
    Randomized depth-first backtracker driven by an explicit stack.

    Every cell tries its four directions once, in its own shuffled order.
    A direction leading off the grid or into an already opened cell is
    dropped; a direction leading into a closed cell carves a passage and
    makes that cell the new top of the stack. A cell with no directions
    left is popped. The run ends when the start cell itself is popped.
    """

    def __init__(self, seed: Optional[int] = None, rng: Optional[random.Random] = None,
                 progress_interval: int = 100):
        super().__init__(seed=seed, rng=rng, progress_interval=progress_interval)
        self.state = GeneratorState.IDLE
        self.draw_count = 0
        self.backtrack_count = 0
        self.max_depth = 0

    def traverse(self, height: int, width: int) -> Iterator[str]:
        self.reseed()
        self.grid.reinitialize(height, width, self.rng)
        self.step_count = 0
        self.draw_count = 0
        self.backtrack_count = 0

        start = self.grid.cell_at(self.rng.randrange(height), self.rng.randrange(width))
        logger.debug(f"Backtracking {height}x{width} from {start.position}")

        # Stack of cells, bottom is the start cell
        stack: List[Cell] = [start]
        self.max_depth = 1
        self.state = GeneratorState.TRAVERSING

        while stack:
            current = stack[-1]
            direction = current.next_candidate_direction()

            if direction is None:
                # Exhausted, never pushed again
                stack.pop()
                self.backtrack_count += 1
                continue

            self.draw_count += 1
            nxt = self.grid.neighbor(current, direction)
            if nxt is None or not nxt.is_closed():
                continue

            self.grid.carve(current, direction)
            stack.append(nxt)
            self.step_count += 1
            if len(stack) > self.max_depth:
                self.max_depth = len(stack)

            # Yield every N steps to keep callers responsive without spamming
            if self.step_count % self.progress_interval == 0:
                yield f"Carving... Stack: {len(stack)}"

        self.state = GeneratorState.DONE
        logger.info(
            f"Generated {height}x{width} maze: {self.step_count} passages, "
            f"{self.draw_count} draws, max depth {self.max_depth}"
        )
        yield "Done"


def generate(height: int, width: int, seed: Optional[int] = None,
             rng: Optional[random.Random] = None) -> Grid:
    """Builds a perfect maze with a throwaway IterativeBacktracker."""
    return IterativeBacktracker(seed=seed, rng=rng).generate(height, width)
