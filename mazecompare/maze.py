"""Maze model and randomized depth-first maze generation."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from enum import IntEnum

INF = 1_000_000_000

# Carving moves two cells at a time; the cell in between is the wall to open.
GEN_STEPS = ((-2, 0), (2, 0), (0, -2), (0, 2))

MIN_WEIGHT = 1
MAX_WEIGHT = 9


class CellType(IntEnum):
    """Kinds of cell in a maze grid."""

    WALL = 0
    PATH = 1
    START = 2
    GOAL = 3
    SHORTEST_PATH = 4


@dataclass(frozen=True, order=True)
class Point:
    """A grid position, ordered by row and then column."""

    r: int
    c: int


@dataclass
class MazeData:
    """A maze in full grid coordinates, with a traversal weight per cell.

    ``rows`` and ``cols`` count logical cells; the grid itself is
    ``2 * rows + 1`` by ``2 * cols + 1`` so that walls have cells of their own.
    """

    rows: int = 15
    cols: int = 15
    grid: list[list[int]] = field(default_factory=list)
    weights: list[list[int]] = field(default_factory=list)
    start: Point = Point(0, 0)
    goal: Point = Point(0, 0)

    @property
    def full_rows(self) -> int:
        return len(self.grid)

    @property
    def full_cols(self) -> int:
        return len(self.grid[0]) if self.grid else 0

    def contains(self, r: int, c: int) -> bool:
        """Return whether (r, c) lies inside the full grid."""
        return 0 <= r < self.full_rows and 0 <= c < self.full_cols


def _shuffled_steps(rng: random.Random):
    steps = list(GEN_STEPS)
    rng.shuffle(steps)
    return iter(steps)


def _carve(maze: MazeData, r: int, c: int, rng: random.Random) -> None:
    """Open a spanning tree of passages starting from (r, c)."""
    grid = maze.grid
    grid[r][c] = CellType.PATH
    stack = [(r, c, _shuffled_steps(rng))]
    while stack:
        r, c, steps = stack[-1]
        for dr, dc in steps:
            nr, nc = r + dr, c + dc
            if maze.contains(nr, nc) and grid[nr][nc] == CellType.WALL:
                grid[r + dr // 2][c + dc // 2] = CellType.PATH
                grid[nr][nc] = CellType.PATH
                stack.append((nr, nc, _shuffled_steps(rng)))
                break
        else:
            stack.pop()


def generate_maze(
    rows: int,
    cols: int,
    start: Point,
    goal: Point,
    rng: random.Random | None = None,
) -> MazeData:
    """Generate a perfect maze of ``rows`` x ``cols`` cells.

    ``start`` and ``goal`` are given in logical cell coordinates; the returned
    maze stores them in full grid coordinates. Every open cell gets a random
    weight from 1 to 9, except the start, whose weight is 1.
    """
    if rows < 1 or cols < 1:
        raise ValueError(f"maze must have at least one row and column, got {rows}x{cols}")
    for name, point in (("start", start), ("goal", goal)):
        if not (0 <= point.r < rows and 0 <= point.c < cols):
            raise ValueError(f"{name} {point} lies outside a {rows}x{cols} maze")

    rng = rng if rng is not None else random.Random()
    full_rows, full_cols = 2 * rows + 1, 2 * cols + 1
    maze = MazeData(
        rows=rows,
        cols=cols,
        grid=[[CellType.WALL] * full_cols for _ in range(full_rows)],
        weights=[[0] * full_cols for _ in range(full_rows)],
    )

    _carve(maze, 2 * rng.randrange(rows) + 1, 2 * rng.randrange(cols) + 1, rng)

    for grid_row, weight_row in zip(maze.grid, maze.weights):
        for c, cell in enumerate(grid_row):
            if cell != CellType.WALL:
                weight_row[c] = rng.randint(MIN_WEIGHT, MAX_WEIGHT)

    maze.start = Point(2 * start.r + 1, 2 * start.c + 1)
    maze.goal = Point(2 * goal.r + 1, 2 * goal.c + 1)

    if maze.grid[maze.start.r][maze.start.c] != CellType.WALL:
        maze.grid[maze.start.r][maze.start.c] = CellType.START
        maze.weights[maze.start.r][maze.start.c] = 1
    if maze.grid[maze.goal.r][maze.goal.c] != CellType.WALL:
        maze.grid[maze.goal.r][maze.goal.c] = CellType.GOAL

    return maze