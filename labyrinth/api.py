"""
Entry points for callers that drive the maze from outside: a UI loop,
a batch script or the test-suite.

    grid = build_grid(10, 10, seed=1)
    handle = start_generation(grid, "prim", seed=1)
    while advance_step(handle) is StepResult.CONTINUING:
        redraw(grid)
"""
from typing import Dict, Type

from labyrinth.algo.base import MazeBuilder, StepResult
from labyrinth.algo.dfs import RecursiveBacktracker
from labyrinth.algo.prim import FrontierGrowth
from labyrinth.core.grid import Cell, Grid
from labyrinth.core.traversal import TraversalGuard

GENERATORS: Dict[str, Type[MazeBuilder]] = {
    "prim": FrontierGrowth,
    "frontier-growth": FrontierGrowth,
    "dfs": RecursiveBacktracker,
    "depth-first": RecursiveBacktracker,
}


def build_grid(rows: int, columns: int, seed: int = None, rng=None) -> Grid:
    return Grid(rows, columns, seed=seed, rng=rng)


def start_generation(grid: Grid, algorithm: str, seed: int = None, rng=None) -> MazeBuilder:
    try:
        cls = GENERATORS[algorithm]
    except KeyError:
        raise ValueError(f"Unknown algorithm {algorithm!r}, expected one of {sorted(GENERATORS)}") from None
    return cls(grid, seed=seed, rng=rng)


def advance_step(handle: MazeBuilder) -> StepResult:
    return handle.step()


def run_to_completion(grid: Grid, algorithm: str, seed: int = None, rng=None) -> MazeBuilder:
    handle = start_generation(grid, algorithm, seed=seed, rng=rng)
    while advance_step(handle) is StepResult.CONTINUING:
        pass
    return handle


def can_move(grid: Grid, cell: Cell, direction: int) -> Cell:
    return TraversalGuard(grid).can_move(cell, direction)


def is_goal(cell: Cell) -> bool:
    return TraversalGuard.is_goal(cell)
