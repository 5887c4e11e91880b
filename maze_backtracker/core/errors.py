class MazeError(Exception):
    """Base class for errors raised by maze_backtracker."""


class InvalidDimension(MazeError, ValueError):
    """Raised when a requested grid height or width is not a positive integer."""

    def __init__(self, name: str, value):
        self.name = name
        self.value = value
        super().__init__(f"{name} must be a positive integer, got {value!r}")
