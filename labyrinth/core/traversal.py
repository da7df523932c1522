import logging
from typing import Optional

from labyrinth.core.errors import IllegalMove
from labyrinth.core.grid import Cell, Grid

logger = logging.getLogger(__name__)


class TraversalGuard:
    """Read-only move validation over a finished grid."""

    def __init__(self, grid: Grid):
        self.grid = grid

    def can_move(self, cell: Cell, direction: int) -> Cell:
        """
        Returns the destination cell, or raises IllegalMove when the wall on
        that side is still standing or the move would leave the grid.
        """
        destination = self.grid.neighbor(cell, direction)
        if destination is None or cell.has_wall(direction):
            raise IllegalMove(cell.row, cell.col, direction)
        return destination

    @staticmethod
    def is_goal(cell: Cell) -> bool:
        return cell.is_goal


class PlaySession:
    """
    Position of the player token. Independent of the generator's current
    pointer; moving never touches walls.
    """

    def __init__(self, grid: Grid):
        self.grid = grid
        self.guard = TraversalGuard(grid)
        self.position: Cell = grid.start
        self.steps = 0
        self.goal_reached = self.guard.is_goal(self.position)

    def move(self, direction: int) -> bool:
        """Returns True if the token moved."""
        if self.goal_reached:
            return False
        try:
            self.position = self.guard.can_move(self.position, direction)
        except IllegalMove:
            return False

        self.steps += 1
        if self.guard.is_goal(self.position):
            self.goal_reached = True
            logger.info(self.message())
        return True

    def reset(self):
        self.position = self.grid.start
        self.steps = 0
        self.goal_reached = self.guard.is_goal(self.position)

    def message(self) -> Optional[str]:
        if not self.goal_reached:
            return None
        return f"Congratulations! You reached the goal in {self.steps} steps."
