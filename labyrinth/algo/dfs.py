from typing import List

from labyrinth.algo.base import MazeBuilder
from labyrinth.core.grid import Cell, CellState, Grid


class RecursiveBacktracker(MazeBuilder):
    name = "dfs"

    def __init__(self, grid: Grid, seed: int = None, rng=None):
        super().__init__(grid, seed=seed, rng=rng)
        # Backtracking history
        self.stack: List[Cell] = []

    def advance(self) -> bool:
        current = self.current
        current.state = CellState.VISITED

        # Re-filtered every step, states change as the walk goes on
        neighbors = [n for n in self.grid.neighbors_of(current)
                     if n.state is CellState.UNVISITED]

        if neighbors:
            nxt = self.rng.choice(neighbors)
            nxt.state = CellState.VISITED
            self.stack.append(current)
            self.carve(current, nxt)
            self.current = nxt
            return True

        if self.stack:
            # Backtrack
            self.current = self.stack.pop()
            return True

        return False

    def status(self) -> str:
        if self.complete:
            return "Done"
        return f"Stack: {len(self.stack)}"
