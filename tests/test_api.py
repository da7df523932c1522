import random
import unittest
import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from labyrinth import api
from labyrinth.algo.base import StepResult
from labyrinth.algo.dfs import RecursiveBacktracker
from labyrinth.algo.prim import FrontierGrowth
from labyrinth.core.complexity import MazeAnalyzer
from labyrinth.core.errors import IllegalMove, InvalidDimension
from labyrinth.core.grid import TOP


class TestApi(unittest.TestCase):
    def test_build_grid(self):
        grid = api.build_grid(4, 3, seed=1)
        self.assertEqual((grid.rows, grid.columns), (4, 3))
        with self.assertRaises(InvalidDimension):
            api.build_grid(0, 3)

    def test_algorithm_names(self):
        grid = api.build_grid(2, 2, seed=1)
        self.assertIsInstance(api.start_generation(grid, "prim"), FrontierGrowth)
        self.assertIsInstance(api.start_generation(grid, "frontier-growth"), FrontierGrowth)
        self.assertIsInstance(api.start_generation(grid, "dfs"), RecursiveBacktracker)
        self.assertIsInstance(api.start_generation(grid, "depth-first"), RecursiveBacktracker)
        with self.assertRaises(ValueError):
            api.start_generation(grid, "kruskal")

    def test_stepping_matches_run_to_completion(self):
        for algo in ("prim", "dfs"):
            with self.subTest(algo=algo):
                stepped = api.build_grid(8, 5, seed=21)
                handle = api.start_generation(stepped, algo, rng=random.Random(4))
                while api.advance_step(handle) is StepResult.CONTINUING:
                    pass
                self.assertIs(api.advance_step(handle), StepResult.COMPLETE)

                batch = api.build_grid(8, 5, seed=21)
                api.run_to_completion(batch, algo, rng=random.Random(4))

                self.assertEqual([c.walls for c in stepped], [c.walls for c in batch])
                self.assertTrue(MazeAnalyzer.is_perfect(batch))

    def test_partial_maze_is_inspectable(self):
        grid = api.build_grid(6, 6, seed=2)
        handle = api.start_generation(grid, "prim", seed=2)
        for _ in range(10):
            api.advance_step(handle)
        self.assertFalse(handle.complete)
        self.assertEqual(len(MazeAnalyzer.passages(grid)), 10)
        self.assertTrue(MazeAnalyzer.walls_consistent(grid))

    def test_restart_after_cancelled_run(self):
        for first, second in [("prim", "prim"), ("dfs", "prim"), ("prim", "dfs"), ("dfs", "dfs")]:
            with self.subTest(first=first, second=second):
                grid = api.build_grid(5, 5, seed=1)
                start, goal = grid.start, grid.goal
                handle = api.start_generation(grid, first, seed=1)
                for _ in range(5):
                    api.advance_step(handle)
                # Abandoned half way, a new run starts from a clean slate
                api.run_to_completion(grid, second, seed=2)

                self.assertTrue(MazeAnalyzer.is_perfect(grid))
                self.assertIs(grid.start, start)
                self.assertIs(grid.goal, goal)

    def test_restart_matches_fresh_grid(self):
        reused = api.build_grid(6, 4, seed=3)
        api.run_to_completion(reused, "dfs", seed=5)
        api.run_to_completion(reused, "prim", rng=random.Random(6))

        fresh = api.build_grid(6, 4, seed=3)
        api.run_to_completion(fresh, "prim", rng=random.Random(6))

        self.assertEqual([c.walls for c in reused], [c.walls for c in fresh])

    def test_can_move_and_is_goal(self):
        grid = api.build_grid(1, 1, seed=1)
        api.run_to_completion(grid, "dfs", seed=1)
        cell = grid.start
        with self.assertRaises(IllegalMove):
            api.can_move(grid, cell, TOP)
        self.assertTrue(api.is_goal(cell))


if __name__ == '__main__':
    unittest.main()
