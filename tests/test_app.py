import random

import pytest

from mazecompare.app import solve_all
from mazecompare.maze import CellType, Point


def _solve(seed=7, rows=8, cols=6, start=Point(0, 0), goal=Point(7, 5)):
    return solve_all(rows, cols, start, goal, random.Random(seed))


def test_same_endpoints_rejected():
    with pytest.raises(ValueError, match="cannot be the same"):
        solve_all(5, 5, Point(2, 2), Point(2, 2), random.Random(1))


def test_endpoint_outside_maze_rejected():
    with pytest.raises(ValueError):
        solve_all(5, 5, Point(0, 0), Point(9, 0), random.Random(1))


def test_returns_three_results_for_generated_maze():
    maze, results = _solve()
    assert len(results) == 3
    assert maze.start == Point(1, 1)
    assert maze.goal == Point(15, 11)
    assert (maze.full_rows, maze.full_cols) == (17, 13)


@pytest.mark.parametrize("seed", [1, 2, 3, 42])
def test_all_solvers_succeed_with_equal_cost(seed):
    _, results = _solve(seed)
    assert all(r.success for r in results)
    costs = {r.total_cost for r in results}
    assert len(costs) == 1


@pytest.mark.parametrize("seed", [5, 11])
def test_paths_are_connected_and_cost_matches_weights(seed):
    maze, results = _solve(seed)
    for result in results:
        path = result.path
        assert path[0] == maze.start
        assert path[-1] == maze.goal
        for a, b in zip(path, path[1:]):
            assert abs(a.r - b.r) + abs(a.c - b.c) == 1
            assert maze.grid[b.r][b.c] != CellType.WALL
        assert sum(maze.weights[p.r][p.c] for p in path) == result.total_cost


def test_solution_grid_marks_interior_path_cells():
    maze, results = _solve(9)
    for result in results:
        for p in result.path[1:-1]:
            assert result.solution_grid[p.r][p.c] == CellType.SHORTEST_PATH
        assert result.solution_grid[maze.start.r][maze.start.c] == CellType.START
        assert result.solution_grid[maze.goal.r][maze.goal.c] == CellType.GOAL


def test_maze_grid_left_unmarked():
    maze, results = solve_all(8, 6, Point(0, 0), Point(7, 5), random.Random(13))
    marked_in_maze = [
        (r, c)
        for r, row in enumerate(maze.grid)
        for c, cell in enumerate(row)
        if cell == CellType.SHORTEST_PATH
    ]
    assert marked_in_maze == []
    marked_in_solution = sum(
        cell == CellType.SHORTEST_PATH for row in results[0].solution_grid for cell in row
    )
    assert marked_in_solution == len(results[0].path) - 2


def test_same_seed_reproduces_maze_and_cost():
    maze_a, results_a = _solve(21)
    maze_b, results_b = _solve(21)
    assert maze_a.grid == maze_b.grid
    assert maze_a.weights == maze_b.weights
    assert [r.path for r in results_a] == [r.path for r in results_b]


def test_nodes_expanded_bounded_by_open_cells():
    maze, results = _solve(17)
    open_cells = sum(cell != CellType.WALL for row in maze.grid for cell in row)
    for result in results:
        assert 1 <= result.nodes_expanded <= open_cells
        assert result.time_taken_ms >= 0.0