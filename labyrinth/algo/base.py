import logging
import random
from abc import ABC, abstractmethod
from enum import Enum
from typing import Iterator

from labyrinth.core.grid import Cell, Grid

logger = logging.getLogger(__name__)


class StepResult(Enum):
    CONTINUING = "continuing"
    COMPLETE = "complete"


class MazeBuilder(ABC):
    """
    Carves a perfect maze into a freshly set up grid, one step at a time.

    The builder never decides when to step: callers either loop over step()
    themselves, consume run(), or call run_all().
    """
    name = "base"

    def __init__(self, grid: Grid, seed: int = None, rng=None):
        self.grid = grid
        self.seed = seed
        self.rng = rng if rng is not None else random.Random(seed)
        self.step_count = 0
        self.carved = 0
        self.complete = False
        # Leftovers from a cancelled run would break the frontier and stack bookkeeping
        grid.reset()
        self.current: Cell = grid.start
        logger.debug("%s generation on %dx%d grid from %s",
                     self.name, grid.rows, grid.columns, self.current.position)

    @abstractmethod
    def advance(self) -> bool:
        """
        Performs one step of the algorithm.
        Returns False once there is no more work to do.
        """

    def step(self) -> StepResult:
        if self.complete:
            return StepResult.COMPLETE

        self.step_count += 1
        if not self.advance():
            self.complete = True
            logger.debug("%s generation complete after %d steps (%d walls removed)",
                         self.name, self.step_count, self.carved)
            return StepResult.COMPLETE
        return StepResult.CONTINUING

    def carve(self, a: Cell, b: Cell):
        self.grid.remove_walls_between(a, b)
        self.carved += 1

    def status(self) -> str:
        return "Done" if self.complete else f"Step {self.step_count}"

    def run(self) -> Iterator[str]:
        """
        Yields a status string after every step.
        The actual grid modifications happen in-place on self.grid.
        """
        while self.step() is StepResult.CONTINUING:
            yield self.status()
        yield self.status()

    def run_all(self):
        """Helper to run the generator to completion."""
        for _ in self.run():
            pass
