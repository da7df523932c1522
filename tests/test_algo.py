import random
import unittest
import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from labyrinth.algo.base import StepResult
from labyrinth.algo.dfs import RecursiveBacktracker
from labyrinth.algo.prim import FrontierGrowth
from labyrinth.core.complexity import MazeAnalyzer
from labyrinth.core.grid import ALL_WALLS, CellState, Grid


class FirstChoiceRandom:
    """Always picks the first option."""
    def randrange(self, n):
        return 0

    def choice(self, seq):
        return seq[0]


def wall_layout(grid):
    return [[cell.walls for cell in row] for row in grid.cells]


class TestGenerators(unittest.TestCase):
    ALGORITHMS = (RecursiveBacktracker, FrontierGrowth)

    def test_spanning_tree(self):
        for cls in self.ALGORITHMS:
            for rows, cols in [(1, 1), (1, 7), (6, 1), (2, 2), (5, 8), (20, 20)]:
                with self.subTest(algo=cls.name, rows=rows, cols=cols):
                    grid = Grid(rows, cols, seed=rows * 31 + cols)
                    cls(grid, seed=42).run_all()

                    self.assertEqual(len(MazeAnalyzer.passages(grid)), rows * cols - 1)
                    self.assertEqual(MazeAnalyzer.reachable(grid), rows * cols)
                    self.assertTrue(MazeAnalyzer.is_perfect(grid))
                    self.assertTrue(all(c.state is CellState.VISITED for c in grid))

    def test_walls_consistent_during_generation(self):
        for cls in self.ALGORITHMS:
            with self.subTest(algo=cls.name):
                grid = Grid(6, 6, seed=3)
                algo = cls(grid, seed=3)
                while algo.step() is StepResult.CONTINUING:
                    self.assertTrue(MazeAnalyzer.walls_consistent(grid))
                self.assertTrue(MazeAnalyzer.walls_consistent(grid))

    def test_prim_carves_once_per_step(self):
        grid = Grid(7, 9, seed=5)
        algo = FrontierGrowth(grid, seed=5)
        algo.run_all()
        # Every cell becomes current once; the last step only finds an empty frontier
        self.assertEqual(algo.step_count, 7 * 9)
        self.assertEqual(algo.carved, 7 * 9 - 1)
        self.assertEqual(algo.frontier, [])

    def test_prim_current_lags_one_step(self):
        grid = Grid(3, 3, rng=FirstChoiceRandom())
        algo = FrontierGrowth(grid, rng=FirstChoiceRandom())
        self.assertIs(algo.step(), StepResult.CONTINUING)
        # Newly chosen current is still tagged frontier until the next step
        self.assertEqual(algo.current.position, (0, 1))
        self.assertIs(algo.current.state, CellState.FRONTIER)
        algo.step()
        self.assertIs(grid.cell(0, 1).state, CellState.VISITED)

    def test_prim_candidates_accumulate(self):
        grid = Grid(3, 3, rng=FirstChoiceRandom())
        algo = FrontierGrowth(grid, rng=FirstChoiceRandom())
        algo.step()  # visits (0,0), moves to (0,1)
        algo.step()  # visits (0,1), moves to (1,0)
        algo.step()  # visits (1,0)
        # (1,1) was discovered from both (0,1) and (1,0)
        self.assertEqual(algo.candidates[(1, 1)], [(0, 1), (1, 0)])

    def test_dfs_golden_layout(self):
        grid = Grid(3, 3, rng=FirstChoiceRandom())
        algo = RecursiveBacktracker(grid, rng=FirstChoiceRandom())
        algo.run_all()

        self.assertEqual(wall_layout(grid), [
            [13, 5, 3],
            [9, 3, 10],
            [14, 12, 6],
        ])
        # 8 forward steps, 8 backtracks, 1 final step
        self.assertEqual(algo.step_count, 17)
        self.assertEqual(algo.carved, 8)
        self.assertEqual(algo.stack, [])

    def test_single_cell(self):
        for cls in self.ALGORITHMS:
            with self.subTest(algo=cls.name):
                grid = Grid(1, 1, seed=1)
                algo = cls(grid, seed=1)
                self.assertIs(algo.step(), StepResult.COMPLETE)
                self.assertEqual(algo.carved, 0)
                self.assertEqual(grid.cells[0][0].walls, ALL_WALLS)
                self.assertIs(grid.start, grid.goal)

    def test_two_by_one(self):
        for cls in self.ALGORITHMS:
            with self.subTest(algo=cls.name):
                grid = Grid(2, 1, seed=9)
                cls(grid, seed=9).run_all()
                upper, lower = grid.cell(0, 0), grid.cell(1, 0)
                self.assertFalse(upper.bottom)
                self.assertFalse(lower.top)
                for cell in (upper, lower):
                    self.assertTrue(cell.left)
                    self.assertTrue(cell.right)
                self.assertTrue(upper.top)
                self.assertTrue(lower.bottom)

    def test_idempotent_completion(self):
        for cls in self.ALGORITHMS:
            with self.subTest(algo=cls.name):
                grid = Grid(4, 4, seed=2)
                algo = cls(grid, seed=2)
                algo.run_all()
                before = wall_layout(grid)
                steps = algo.step_count
                for _ in range(3):
                    self.assertIs(algo.step(), StepResult.COMPLETE)
                self.assertEqual(wall_layout(grid), before)
                self.assertEqual(algo.step_count, steps)

    def test_determinism(self):
        for cls in self.ALGORITHMS:
            with self.subTest(algo=cls.name):
                grid1 = Grid(10, 12, seed=12345)
                cls(grid1, rng=random.Random(99)).run_all()

                grid2 = Grid(10, 12, seed=12345)
                algo = cls(grid2, rng=random.Random(99))
                # Stepped by hand instead of run_all()
                while algo.step() is not StepResult.COMPLETE:
                    pass

                self.assertEqual(wall_layout(grid1), wall_layout(grid2))

    def test_run_yields_status(self):
        grid = Grid(3, 3, seed=4)
        statuses = list(RecursiveBacktracker(grid, seed=4).run())
        self.assertEqual(statuses[-1], "Done")
        self.assertTrue(statuses[0].startswith("Stack:"))


if __name__ == '__main__':
    unittest.main()
