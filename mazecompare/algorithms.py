"""Shortest-path solvers over weighted mazes: Dijkstra, bucket queue and A*."""

from __future__ import annotations

import heapq
import math
import time
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Iterator

from .maze import INF, CellType, MazeData, Point

# Order in which neighbours are examined: down, up, right, left.
NEIGHBOUR_STEPS = ((1, 0), (-1, 0), (0, 1), (0, -1))

MAX_BUCKET_COST = 10_000
BUCKET_DELTA = 1


@dataclass
class AlgorithmResult:
    """Outcome of one solver run on one maze."""

    success: bool = False
    total_cost: int = INF
    nodes_expanded: int = 0
    time_taken_ms: float = 0.0
    solution_grid: list[list[int]] = field(default_factory=list)
    path: list[Point] = field(default_factory=list)


def heuristic(r: int, c: int, goal_r: int, goal_c: int) -> int:
    """Manhattan distance from (r, c) to the goal."""
    return abs(goal_r - r) + abs(goal_c - c)


def _new_result(maze: MazeData) -> AlgorithmResult:
    return AlgorithmResult(solution_grid=[list(row) for row in maze.grid])


@contextmanager
def _timed(result: AlgorithmResult) -> Iterator[None]:
    started = time.perf_counter()
    try:
        yield
    finally:
        result.time_taken_ms = (time.perf_counter() - started) * 1000.0


def _open_neighbours(maze: MazeData, point: Point) -> Iterator[Point]:
    for dr, dc in NEIGHBOUR_STEPS:
        nr, nc = point.r + dr, point.c + dc
        if maze.contains(nr, nc) and maze.grid[nr][nc] != CellType.WALL:
            yield Point(nr, nc)


def _record_path(result: AlgorithmResult, maze: MazeData, parents: dict[Point, Point]) -> None:
    """Walk parents back from the goal, marking the route on the solution grid."""
    path = []
    node = maze.goal
    while node != maze.start:
        if result.solution_grid[node.r][node.c] not in (CellType.GOAL, CellType.START):
            result.solution_grid[node.r][node.c] = CellType.SHORTEST_PATH
        path.append(node)
        node = parents[node]
    path.append(maze.start)
    path.reverse()
    result.path = path


def _weight(maze: MazeData, point: Point) -> int:
    return maze.weights[point.r][point.c]


def solve_dijkstra(maze: MazeData) -> AlgorithmResult:
    """Find the cheapest route with Dijkstra's algorithm and a binary heap."""
    result = _new_result(maze)
    with _timed(result):
        start = maze.start
        dist: dict[Point, float] = {start: _weight(maze, start)}
        parents: dict[Point, Point] = {}
        visited: set[Point] = set()
        heap = [(dist[start], start)]

        while heap:
            cost, point = heapq.heappop(heap)
            if point in visited:
                continue
            visited.add(point)
            result.nodes_expanded += 1

            if point == maze.goal:
                result.success = True
                result.total_cost = cost
                _record_path(result, maze, parents)
                break

            for nxt in _open_neighbours(maze, point):
                if nxt in visited:
                    continue
                new_cost = cost + _weight(maze, nxt)
                if new_cost < dist.get(nxt, math.inf):
                    dist[nxt] = new_cost
                    parents[nxt] = point
                    heapq.heappush(heap, (new_cost, nxt))
    return result


def _bucket_index(cost: int) -> int:
    return min(max(cost // BUCKET_DELTA, 0), MAX_BUCKET_COST - 1)


def solve_bucket(maze: MazeData) -> AlgorithmResult:
    """Find the cheapest route with a bucket queue of unit width.

    Costs at or above the last bucket all share it; each bucket is served
    last-in first-out.
    """
    result = _new_result(maze)
    with _timed(result):
        start = maze.start
        dist: dict[Point, float] = {start: _weight(maze, start)}
        parents: dict[Point, Point] = {}
        visited: set[Point] = set()
        buckets: list[list[Point]] = [[] for _ in range(MAX_BUCKET_COST)]
        buckets[_bucket_index(dist[start])].append(start)

        for bucket in buckets:
            while bucket:
                point = bucket.pop()
                if point in visited:
                    continue
                visited.add(point)
                result.nodes_expanded += 1

                if point == maze.goal:
                    result.success = True
                    result.total_cost = dist[point]
                    _record_path(result, maze, parents)
                    return result

                for nxt in _open_neighbours(maze, point):
                    if nxt in visited:
                        continue
                    new_cost = dist[point] + _weight(maze, nxt)
                    if new_cost < dist.get(nxt, math.inf):
                        dist[nxt] = new_cost
                        parents[nxt] = point
                        buckets[_bucket_index(new_cost)].append(nxt)
    return result


def solve_astar(maze: MazeData) -> AlgorithmResult:
    """Find the cheapest route with A* guided by Manhattan distance.

    Among entries of equal f-score the one with the larger g-score is taken first.
    """
    result = _new_result(maze)
    goal = maze.goal
    with _timed(result):
        start = maze.start
        g_score: dict[Point, float] = {start: _weight(maze, start)}
        parents: dict[Point, Point] = {}
        closed: set[Point] = set()
        g0 = g_score[start]
        heap = [(g0 + heuristic(start.r, start.c, goal.r, goal.c), -g0, start)]

        while heap:
            _, neg_g, point = heapq.heappop(heap)
            g = -neg_g
            if g > g_score[point] or point in closed:
                continue
            closed.add(point)
            result.nodes_expanded += 1

            if point == goal:
                result.success = True
                result.total_cost = g
                _record_path(result, maze, parents)
                return result

            for nxt in _open_neighbours(maze, point):
                if nxt in closed:
                    continue
                tentative = g + _weight(maze, nxt)
                if tentative < g_score.get(nxt, math.inf):
                    g_score[nxt] = tentative
                    parents[nxt] = point
                    f = tentative + heuristic(nxt.r, nxt.c, goal.r, goal.c)
                    heapq.heappush(heap, (f, -tentative, nxt))
    return result