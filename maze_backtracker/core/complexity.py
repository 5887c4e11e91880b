from collections import Counter, deque
from typing import Dict, Optional, Set, Tuple

from maze_backtracker.core.cell import Cell, Direction
from maze_backtracker.core.grid import Grid


class MazeStats:
    @staticmethod
    def count_passages(grid: Grid) -> int:
        """
        Number of opened connections. Each one is counted once, from the
        cell on its north or west side.
        """
        passages = 0
        for cell in grid:
            if not cell.has_wall(Direction.SOUTH) and grid.neighbor(cell, Direction.SOUTH) is not None:
                passages += 1
            if not cell.has_wall(Direction.EAST) and grid.neighbor(cell, Direction.EAST) is not None:
                passages += 1
        return passages

    @staticmethod
    def reachable_from(grid: Grid, start: Optional[Cell] = None) -> Set[Tuple[int, int]]:
        """
        BFS flood fill over opened walls. Returns the positions reached.
        """
        if len(grid) == 0:
            return set()
        if start is None:
            start = grid.cell_at(0, 0)

        seen = {start.position}
        queue = deque([start])
        while queue:
            current = queue.popleft()
            for other in grid.open_neighbors(current):
                if other.position not in seen:
                    seen.add(other.position)
                    queue.append(other)
        return seen

    @staticmethod
    def is_perfect(grid: Grid) -> bool:
        # Connected with n - 1 edges means a spanning tree
        total = len(grid)
        if total == 0:
            return False
        if MazeStats.count_passages(grid) != total - 1:
            return False
        return len(MazeStats.reachable_from(grid)) == total

    @staticmethod
    def calculate_stats(grid: Grid) -> Dict[str, float]:
        """
        Classifies cells by how many walls they keep: 3 is a dead end,
        2 a corridor, fewer a junction.
        """
        by_walls = Counter(cell.wall_count() for cell in grid)
        dead_ends = by_walls[3]
        corridors = by_walls[2]
        intersections = by_walls[0] + by_walls[1]

        total = len(grid)
        return {
            "dead_ends": dead_ends,
            "corridors": corridors,
            "intersections": intersections,
            "passages": MazeStats.count_passages(grid),
            "dead_end_percent": (dead_ends / total) * 100 if total > 0 else 0
        }
