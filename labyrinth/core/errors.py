class MazeError(Exception):
    """Base class for everything the maze core raises."""


class InvalidDimension(MazeError, ValueError):
    """Rows or columns were not positive integers."""

    def __init__(self, rows, columns):
        super().__init__(f"Grid dimensions must be positive, got {rows}x{columns}")
        self.rows = rows
        self.columns = columns


class IllegalMove(MazeError):
    """The requested move is blocked by a wall or leaves the grid."""

    def __init__(self, row: int, col: int, direction: int):
        super().__init__(f"Cannot move {direction} from ({row}, {col})")
        self.row = row
        self.col = col
        self.direction = direction


class InvalidAdjacency(MazeError, RuntimeError):
    # Only reachable through a bug in a generator, never through user input.
    def __init__(self, a, b):
        super().__init__(f"Cells {a} and {b} are not grid-adjacent")
        self.a = a
        self.b = b
