from typing import Dict, List, Tuple

from labyrinth.algo.base import MazeBuilder
from labyrinth.core.grid import CellState, Grid

Position = Tuple[int, int]


class FrontierGrowth(MazeBuilder):
    """
    Randomized Prim-style growth.

    Every step the current cell joins the visited territory and its unvisited
    neighbours join the frontier. A random frontier cell is then connected to
    one of the visited cells that discovered it and becomes the next current.
    The chosen cell stays tagged FRONTIER until the following step promotes it.
    """
    name = "prim"

    def __init__(self, grid: Grid, seed: int = None, rng=None):
        super().__init__(grid, seed=seed, rng=rng)
        # Frontier: list for random choice + index map for O(1) swap removal
        self.frontier: List[Position] = []
        self._frontier_index: Dict[Position, int] = {}
        # Frontier cell -> visited cells it could be connected to
        self.candidates: Dict[Position, List[Position]] = {}

    def _add_frontier(self, pos: Position):
        self._frontier_index[pos] = len(self.frontier)
        self.frontier.append(pos)

    def _remove_frontier(self, pos: Position):
        idx = self._frontier_index.pop(pos, None)
        if idx is None:
            return
        last = self.frontier.pop()
        if idx < len(self.frontier):
            # Swap remove
            self.frontier[idx] = last
            self._frontier_index[last] = idx

    def advance(self) -> bool:
        current = self.current
        pos = current.position

        self._remove_frontier(pos)
        current.state = CellState.VISITED

        for neighbor in self.grid.neighbors_of(current):
            if neighbor.state is CellState.UNVISITED:
                neighbor.state = CellState.FRONTIER
                self._add_frontier(neighbor.position)
                self.candidates[neighbor.position] = [pos]
            elif neighbor.state is CellState.FRONTIER:
                self.candidates[neighbor.position].append(pos)

        if not self.frontier:
            return False

        fr, fc = self.rng.choice(self.frontier)
        cr, cc = self.rng.choice(self.candidates[(fr, fc)])
        chosen = self.grid.cells[fr][fc]
        self.carve(chosen, self.grid.cells[cr][cc])
        self.current = chosen
        return True

    def status(self) -> str:
        if self.complete:
            return "Done"
        return f"Frontier: {len(self.frontier)}"
