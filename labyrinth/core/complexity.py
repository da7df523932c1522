from typing import Dict, FrozenSet, Set, Tuple

from labyrinth.core.grid import DIRECTIONS, OPPOSITE, Grid

Edge = FrozenSet[Tuple[int, int]]


class MazeAnalyzer:
    @staticmethod
    def passages(grid: Grid) -> Set[Edge]:
        """Every removed wall, as an unordered pair of cell positions."""
        edges = set()
        for cell in grid:
            for other in grid.open_neighbors(cell):
                edges.add(frozenset((cell.position, other.position)))
        return edges

    @staticmethod
    def walls_consistent(grid: Grid) -> bool:
        """True if every shared wall is either present on both sides or on neither."""
        for cell in grid:
            for direction in DIRECTIONS:
                other = grid.neighbor(cell, direction)
                if other is None:
                    continue
                if cell.has_wall(direction) != other.has_wall(OPPOSITE[direction]):
                    return False
        return True

    @staticmethod
    def reachable(grid: Grid, origin=None) -> int:
        """Flood fill through removed walls; returns the number of cells reached."""
        origin = origin or grid.start
        seen = {origin.position}
        stack = [origin]
        while stack:
            cell = stack.pop()
            for other in grid.open_neighbors(cell):
                if other.position not in seen:
                    seen.add(other.position)
                    stack.append(other)
        return len(seen)

    @staticmethod
    def is_perfect(grid: Grid) -> bool:
        """
        A maze is perfect when its passages form a spanning tree:
        everything is reachable and there is exactly one passage fewer than cells.
        """
        if not MazeAnalyzer.walls_consistent(grid):
            return False
        total = len(grid)
        return (len(MazeAnalyzer.passages(grid)) == total - 1
                and MazeAnalyzer.reachable(grid) == total)

    @staticmethod
    def calculate_stats(grid: Grid) -> Dict[str, float]:
        dead_ends = 0
        intersections = 0  # 0, 1 walls
        corridors = 0  # 2 walls

        def popcount_walls(cell):
            return sum(1 for d in DIRECTIONS if cell.has_wall(d))

        for cell in grid:
            walls = popcount_walls(cell)
            if walls == 3: dead_ends += 1
            elif walls == 2: corridors += 1
            elif walls <= 1: intersections += 1

        total = len(grid)
        return {
            "passages": len(MazeAnalyzer.passages(grid)),
            "dead_ends": dead_ends,
            "corridors": corridors,
            "intersections": intersections,
            "dead_end_percent": (dead_ends / total) * 100 if total > 0 else 0
        }
