"""Drawing rules for a solved maze: cell colours, layout, captions, path animation."""

from __future__ import annotations

from dataclasses import dataclass

from .algorithms import AlgorithmResult
from .maze import CellType

Color = tuple[int, int, int]

WALL_COLOR: Color = (80, 80, 80)
START_COLOR: Color = (0, 150, 255)
GOAL_COLOR: Color = (255, 50, 50)
SOLUTION_COLOR: Color = (255, 200, 0)
UNKNOWN_COLOR: Color = (255, 255, 255)
BACKGROUND_COLOR: Color = (255, 228, 225)

DEFAULT_CELL_SIZE = 15
MIN_CELL_SIZE = 3
MAX_CELL_SIZE = 30
MIN_OFFSET_X = 10
OFFSET_Y = 40
HORIZONTAL_MARGIN = 40
VERTICAL_MARGIN = 130

STEP_INTERVAL_MS = 50


def cell_color(cell_type: int, weight: int) -> Color:
    """Return the RGB colour for a cell; open cells darken as their weight grows."""
    if cell_type == CellType.WALL:
        return WALL_COLOR
    if cell_type == CellType.START:
        return START_COLOR
    if cell_type == CellType.GOAL:
        return GOAL_COLOR
    if cell_type == CellType.SHORTEST_PATH:
        return SOLUTION_COLOR
    if cell_type == CellType.PATH:
        green = max(200 - weight * 15, 100)
        blue = max(220 - weight * 20, 100)
        return (255, green, blue)
    return UNKNOWN_COLOR


@dataclass(frozen=True)
class CellLayout:
    """Size of one cell in pixels and where the grid's top-left corner goes."""

    cell_size: int = DEFAULT_CELL_SIZE
    offset_x: int = MIN_OFFSET_X
    offset_y: int = OFFSET_Y


def _trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b > 0) else -q


def compute_cell_layout(width: int, height: int, full_rows: int, full_cols: int) -> CellLayout:
    """Fit a ``full_rows`` x ``full_cols`` grid into a drawing area of the given size."""
    if full_rows == 0 or full_cols == 0:
        return CellLayout()

    max_cell_width = _trunc_div(width - HORIZONTAL_MARGIN, full_cols)
    max_cell_height = _trunc_div(height - VERTICAL_MARGIN, full_rows)
    cell_size = min(max_cell_width, max_cell_height)
    cell_size = min(max(cell_size, MIN_CELL_SIZE), MAX_CELL_SIZE)

    offset_x = max(_trunc_div(width - full_cols * cell_size, 2), MIN_OFFSET_X)
    return CellLayout(cell_size=cell_size, offset_x=offset_x, offset_y=OFFSET_Y)


def stats_caption(result: AlgorithmResult) -> str | None:
    """Summarise a result in one line, or None if the solver expanded nothing."""
    if result.nodes_expanded <= 0:
        return None
    if result.success:
        return (
            f"Cost: {result.total_cost} | Nodes: {result.nodes_expanded} | "
            f"Time: {result.time_taken_ms:.2f}ms"
        )
    return "No path found"


def _copy_grid(grid: list[list[int]]) -> list[list[int]]:
    return [list(row) for row in grid]


class PathAnimation:
    """Reveals a solver's path on the maze one cell per step.

    While idle after a reset the display shows the bare maze; stopping shows
    the full solution.
    """

    def __init__(self, maze_grid: list[list[int]], result: AlgorithmResult) -> None:
        self.base_grid = _copy_grid(maze_grid)
        self.solution_grid = _copy_grid(result.solution_grid)
        self.path = list(result.path)
        self.display_grid = _copy_grid(self.base_grid)
        self.step_index = 0
        self.running = False

    @property
    def caption(self) -> str:
        return f"Step {self.step_index}/{len(self.path)}"

    def start(self) -> None:
        """Begin revealing the path from its first cell."""
        if self.running or not self.path:
            return
        self.running = True
        self.step_index = 0
        self.display_grid = _copy_grid(self.base_grid)

    def stop(self) -> None:
        """Halt the animation and show the complete solution."""
        if not self.running:
            return
        self.running = False
        self.display_grid = _copy_grid(self.solution_grid)

    def reset(self) -> None:
        """Halt the animation and show the bare maze."""
        self.stop()
        self.step_index = 0
        self.display_grid = _copy_grid(self.base_grid)

    def step(self) -> bool:
        """Reveal the next path cell; return False once the path is exhausted."""
        if self.step_index >= len(self.path):
            self.stop()
            return False
        point = self.path[self.step_index]
        if self.display_grid[point.r][point.c] not in (CellType.START, CellType.GOAL):
            self.display_grid[point.r][point.c] = CellType.SHORTEST_PATH
        self.step_index += 1
        return True