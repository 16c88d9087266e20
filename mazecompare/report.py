"""Comparison table rows and configuration checks for the solver comparison."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from .algorithms import AlgorithmResult
from .maze import Point

ALGORITHM_NAMES = ("Dijkstra", "Bucket/Stepping", "A*")
BEST_ROW_NAME = "Best"
TABLE_HEADERS = ("Algorithm", "Success", "Cost", "Nodes", "Time (ms)")

SIZE_RANGE = (5, 50)
DEFAULT_SIZE = 15

YES = "✓ Yes"
NO = "✗ No"
NOT_AVAILABLE = "N/A"


@dataclass(frozen=True)
class ResultRow:
    """One row of the comparison table, as display text."""

    algorithm: str
    success: str
    cost: str
    nodes: str
    time: str

    def cells(self) -> tuple[str, str, str, str, str]:
        return (self.algorithm, self.success, self.cost, self.nodes, self.time)


@dataclass(frozen=True)
class BestSummary:
    """The table's closing row naming the fastest algorithm.

    ``best_index`` is None when not every algorithm found a path.
    """

    best_index: int | None
    success: str
    cost: str
    nodes: str
    time: str

    def cells(self) -> tuple[str, str, str, str, str]:
        return (BEST_ROW_NAME, self.success, self.cost, self.nodes, self.time)


def format_result_row(name: str, result: AlgorithmResult) -> ResultRow:
    """Render one algorithm's result as table text."""
    return ResultRow(
        algorithm=name,
        success=YES if result.success else NO,
        cost=str(result.total_cost) if result.success else NOT_AVAILABLE,
        nodes=str(result.nodes_expanded),
        time=f"{result.time_taken_ms:.3f}",
    )


def best_summary(results: Sequence[AlgorithmResult]) -> BestSummary:
    """Pick the fastest result if all succeeded; earlier entries win ties."""
    if not results:
        raise ValueError("no results to compare")
    if not all(r.success for r in results):
        return BestSummary(None, NOT_AVAILABLE, NOT_AVAILABLE, NOT_AVAILABLE, NOT_AVAILABLE)

    best_index = 0
    best_time = results[0].time_taken_ms
    for index, result in enumerate(results[1:], start=1):
        if result.time_taken_ms < best_time:
            best_index, best_time = index, result.time_taken_ms
    return BestSummary(
        best_index=best_index,
        success=YES,
        cost=f"{best_time:.3f} ms",
        nodes="Fastest",
        time=f"Row {best_index + 1}",
    )


def clamp_endpoints(rows: int, cols: int, start: Point, goal: Point) -> tuple[Point, Point]:
    """Pull start and goal back inside a maze of ``rows`` x ``cols`` cells."""

    def clamp(p: Point) -> Point:
        return Point(min(p.r, rows - 1), min(p.c, cols - 1))

    return clamp(start), clamp(goal)


def check_endpoints(start: Point, goal: Point) -> None:
    """Raise ValueError if start and goal coincide."""
    if start == goal:
        raise ValueError("Start and goal positions cannot be the same.")