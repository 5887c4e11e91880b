import random
import time
from abc import ABC, abstractmethod
from typing import Iterator, Optional, Tuple

from maze_backtracker.core.grid import Grid, check_dimensions


class MazeGenerator(ABC):
    def __init__(self, seed: Optional[int] = None, rng: Optional[random.Random] = None,
                 progress_interval: int = 100):
        if isinstance(progress_interval, bool) or not isinstance(progress_interval, int) or progress_interval < 1:
            raise ValueError(f"progress_interval must be a positive integer, got {progress_interval!r}")
        self.seed = seed
        self.injected_rng = rng is not None
        self.rng = rng if rng is not None else random.Random()
        self.progress_interval = progress_interval
        self.grid = Grid()
        self.step_count = 0

    @staticmethod
    def validate_dimensions(height: int, width: int) -> Tuple[int, int]:
        return check_dimensions(height, width)

    def reseed(self):
        """
        Seed policy for one run: a fixed seed is reapplied every time,
        an injected rng is left alone, otherwise the clock is used.
        """
        if self.seed is not None:
            self.rng.seed(self.seed)
        elif not self.injected_rng:
            self.rng.seed(time.time_ns())

    def run(self, height: int, width: int) -> Iterator[str]:
        """
        Yields status strings or progress updates.
        The actual grid modifications happen in-place on self.grid.
        Bad dimensions raise here, before iteration starts.
        """
        height, width = self.validate_dimensions(height, width)
        return self.traverse(height, width)

    @abstractmethod
    def traverse(self, height: int, width: int) -> Iterator[str]:
        pass

    def run_all(self, height: int, width: int):
        """Helper to run the generator to completion."""
        for _ in self.run(height, width):
            pass

    def generate(self, height: int, width: int) -> Grid:
        self.run_all(height, width)
        return self.grid
