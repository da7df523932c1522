import random
from enum import Enum
from typing import Iterator, List, Optional, Tuple

from labyrinth.core.errors import InvalidAdjacency, InvalidDimension

# Bitmask Constants
TOP    = 0b0001
RIGHT  = 0b0010
BOTTOM = 0b0100
LEFT   = 0b1000

# All walls present by default (T|R|B|L) = 15
ALL_WALLS = TOP | RIGHT | BOTTOM | LEFT

# Adjacency order matters: generators with a "first choice" RNG rely on it.
DIRECTIONS = (TOP, RIGHT, BOTTOM, LEFT)

# Direction Helpers
DROW = {TOP: -1, BOTTOM: 1, RIGHT: 0, LEFT: 0}
DCOL = {TOP: 0, BOTTOM: 0, RIGHT: 1, LEFT: -1}
OPPOSITE = {TOP: BOTTOM, BOTTOM: TOP, RIGHT: LEFT, LEFT: RIGHT}
NAMES = {TOP: "top", RIGHT: "right", BOTTOM: "bottom", LEFT: "left"}


class CellState(Enum):
    UNVISITED = "unvisited"
    FRONTIER = "frontier"
    VISITED = "visited"


class Cell:
    """
    A single grid position.
    Walls are packed into one int (see the TOP/RIGHT/BOTTOM/LEFT bits);
    the boolean properties are views over that mask.
    """
    __slots__ = ('row', 'col', 'walls', 'state', 'is_goal', 'adjacent')

    def __init__(self, row: int, col: int):
        self.row = row
        self.col = col
        self.walls = ALL_WALLS
        self.state = CellState.UNVISITED
        self.is_goal = False
        # (row, col) of grid neighbours, filled in by Grid.setup()
        self.adjacent: List[Tuple[int, int]] = []

    @property
    def position(self) -> Tuple[int, int]:
        return (self.row, self.col)

    def has_wall(self, direction: int) -> bool:
        return (self.walls & direction) != 0

    @property
    def top(self) -> bool:
        return self.has_wall(TOP)

    @property
    def right(self) -> bool:
        return self.has_wall(RIGHT)

    @property
    def bottom(self) -> bool:
        return self.has_wall(BOTTOM)

    @property
    def left(self) -> bool:
        return self.has_wall(LEFT)

    def __repr__(self):
        return f"Cell({self.row}, {self.col}, walls={self.walls:04b}, {self.state.value})"


class Grid:
    __slots__ = ('rows', 'columns', 'cells', 'start', 'goal')

    def __init__(self, rows: int, columns: int, seed: int = None, rng=None):
        if not isinstance(rows, int) or not isinstance(columns, int) or rows <= 0 or columns <= 0:
            raise InvalidDimension(rows, columns)
        self.rows = rows
        self.columns = columns
        self.cells: List[List[Cell]] = []
        self.start: Optional[Cell] = None
        self.goal: Optional[Cell] = None
        self.setup(rng if rng is not None else random.Random(seed))

    def setup(self, rng):
        """
        Allocates the cells row-major, links each one to its grid neighbours
        and places the start and goal cells.
        Start and goal are independent draws and may land on the same cell.
        """
        self.cells = [[Cell(r, c) for c in range(self.columns)] for r in range(self.rows)]

        for cell in self:
            cell.adjacent = [(nr, nc) for nr, nc, _ in self.get_neighbors(cell.row, cell.col)]

        self.start = self.cells[rng.randrange(self.rows)][rng.randrange(self.columns)]
        self.goal = self.cells[rng.randrange(self.rows)][rng.randrange(self.columns)]
        self.goal.is_goal = True

    def reset(self):
        """Restores every wall and clears generation state. Start and goal stay put."""
        for cell in self:
            cell.walls = ALL_WALLS
            cell.state = CellState.UNVISITED

    def __iter__(self) -> Iterator[Cell]:
        for row in self.cells:
            yield from row

    def __len__(self) -> int:
        return self.rows * self.columns

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.columns

    def cell(self, row: int, col: int) -> Cell:
        if self.in_bounds(row, col):
            return self.cells[row][col]
        raise IndexError(f"Coordinate ({row}, {col}) out of bounds")

    def get_neighbors(self, row: int, col: int) -> Iterator[Tuple[int, int, int]]:
        """
        Yields (nrow, ncol, direction_to_neighbor) for all valid grid neighbors,
        in top, right, bottom, left order.
        Does NOT check walls.
        """
        for direction in DIRECTIONS:
            nr, nc = row + DROW[direction], col + DCOL[direction]
            if self.in_bounds(nr, nc):
                yield (nr, nc, direction)

    def neighbors_of(self, cell: Cell) -> List[Cell]:
        return [self.cells[r][c] for r, c in cell.adjacent]

    def neighbor(self, cell: Cell, direction: int) -> Optional[Cell]:
        nr, nc = cell.row + DROW[direction], cell.col + DCOL[direction]
        if self.in_bounds(nr, nc):
            return self.cells[nr][nc]
        return None

    def remove_walls_between(self, a: Cell, b: Cell):
        """
        Removes the wall between two grid-adjacent cells on both sides at once.
        This is the only place a wall flag is ever cleared.
        """
        dc = b.col - a.col
        dr = b.row - a.row
        if abs(dc) + abs(dr) != 1:
            raise InvalidAdjacency(a.position, b.position)

        if dc == 1:
            a.walls &= ~RIGHT
            b.walls &= ~LEFT
        elif dc == -1:
            a.walls &= ~LEFT
            b.walls &= ~RIGHT
        elif dr == 1:
            a.walls &= ~BOTTOM
            b.walls &= ~TOP
        else:
            a.walls &= ~TOP
            b.walls &= ~BOTTOM

    def open_neighbors(self, cell: Cell) -> Iterator[Cell]:
        """Yields neighbours reachable from cell through a removed wall."""
        for direction in DIRECTIONS:
            if not cell.has_wall(direction):
                other = self.neighbor(cell, direction)
                if other is not None:
                    yield other
