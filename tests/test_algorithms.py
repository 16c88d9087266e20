import random

import pytest

from mazecompare.algorithms import (
    AlgorithmResult,
    heuristic,
    solve_astar,
    solve_bucket,
    solve_dijkstra,
)
from mazecompare.maze import INF, CellType, MazeData, Point, generate_maze

SOLVERS = [solve_dijkstra, solve_bucket, solve_astar]


def make_maze(layout, start, goal):
    grid = [[CellType.WALL if ch == "#" else CellType.PATH for ch in line] for line in layout]
    weights = [[0 if ch == "#" else int(ch) for ch in line] for line in layout]
    grid[start.r][start.c] = CellType.START
    grid[goal.r][goal.c] = CellType.GOAL
    return MazeData(
        rows=(len(layout) - 1) // 2,
        cols=(len(layout[0]) - 1) // 2,
        grid=grid,
        weights=weights,
        start=start,
        goal=goal,
    )


LOOP = [
    "#####",
    "#191#",
    "#1#1#",
    "#111#",
    "#####",
]


def path_cost(maze, path):
    return sum(maze.weights[p.r][p.c] for p in path)


def assert_valid_path(maze, result):
    assert result.path[0] == maze.start
    assert result.path[-1] == maze.goal
    for a, b in zip(result.path, result.path[1:]):
        assert abs(a.r - b.r) + abs(a.c - b.c) == 1
    for p in result.path:
        assert maze.grid[p.r][p.c] != CellType.WALL
    assert path_cost(maze, result.path) == result.total_cost


@pytest.fixture(params=[3, 11, 29])
def generated(request):
    return generate_maze(12, 10, Point(0, 0), Point(11, 9), random.Random(request.param))


def test_heuristic_is_manhattan_distance():
    assert heuristic(0, 0, 3, 4) == 7
    assert heuristic(3, 4, 0, 0) == heuristic(0, 0, 3, 4)
    assert heuristic(5, 5, 5, 5) == 0


@pytest.mark.parametrize("solver", SOLVERS)
def test_cheaper_long_route_preferred(solver):
    maze = make_maze(LOOP, Point(1, 1), Point(1, 3))
    result = solver(maze)
    assert result.success
    assert result.total_cost == 7
    assert Point(1, 2) not in result.path
    assert_valid_path(maze, result)


@pytest.mark.parametrize("solver", SOLVERS)
def test_solution_grid_marks_route_only(solver):
    maze = make_maze(LOOP, Point(1, 1), Point(1, 3))
    result = solver(maze)
    grid = result.solution_grid
    assert grid[1][1] == CellType.START
    assert grid[1][3] == CellType.GOAL
    for p in result.path[1:-1]:
        assert grid[p.r][p.c] == CellType.SHORTEST_PATH
    assert grid[1][2] == CellType.PATH
    # the input maze is left untouched
    assert all(cell != CellType.SHORTEST_PATH for row in maze.grid for cell in row)


@pytest.mark.parametrize("solver", SOLVERS)
def test_unreachable_goal(solver):
    layout = [
        "#####",
        "#1#1#",
        "#####",
    ]
    maze = make_maze(layout, Point(1, 1), Point(1, 3))
    result = solver(maze)
    assert not result.success
    assert result.total_cost == INF
    assert result.path == []
    assert result.nodes_expanded == 1
    assert result.solution_grid == [list(row) for row in maze.grid]


@pytest.mark.parametrize("solver", SOLVERS)
def test_generated_maze_solution_is_valid(solver, generated):
    result = solver(generated)
    assert result.success
    assert_valid_path(generated, result)
    assert result.nodes_expanded >= len(result.path)
    assert result.time_taken_ms >= 0.0


def test_solvers_agree_on_generated_maze(generated):
    results = [solver(generated) for solver in SOLVERS]
    costs = {r.total_cost for r in results}
    assert len(costs) == 1
    # a perfect maze has exactly one simple route
    assert results[0].path == results[1].path == results[2].path


def test_solvers_agree_on_open_grid_with_loops():
    rng = random.Random(5)
    width = 9
    layout = ["#" * width]
    for _ in range(7):
        layout.append("#" + "".join(str(rng.randint(1, 9)) for _ in range(width - 2)) + "#")
    layout.append("#" * width)
    maze = make_maze(layout, Point(1, 1), Point(7, 7))
    results = [solver(maze) for solver in SOLVERS]
    assert len({r.total_cost for r in results}) == 1
    for r in results:
        assert_valid_path(maze, r)


def test_start_weight_is_included_in_cost():
    layout = [
        "####",
        "#52#",
        "####",
    ]
    maze = make_maze(layout, Point(1, 1), Point(1, 2))
    for solver in SOLVERS:
        result = solver(maze)
        assert result.total_cost == maze.weights[1][1] + maze.weights[1][2]
        assert result.path == [maze.start, maze.goal]


def test_default_result_is_a_failure():
    result = AlgorithmResult()
    assert result.success is False
    assert result.total_cost == INF
    assert result.path == []