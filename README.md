# mazecompare

A small desktop tool for comparing three shortest-path algorithms on the same
randomly generated, weighted maze:

- **Dijkstra** with a binary-heap priority queue (`solve_dijkstra`),
- **Bucket / stepping** search with one bucket per integer cost
  (`solve_bucket`),
- **A\*** with a Manhattan-distance heuristic (`solve_astar`).

Mazes are perfect mazes carved by a randomized depth-first search. Every open
cell carries a weight from 1 to 9; the start cell always has weight 1, and a
path's cost is the sum of the weights of the cells on it, start included.

## Installation

```
pip install .
```

The graphical interface uses Tkinter from the Python standard library, so no
third-party packages are required. If the Python installation has no Tk
support, starting the window raises `RuntimeError`; the rest of the package
still works.

## Running the application

```
mazecompare
mazecompare --seed 42
```

`--seed` makes maze generation repeatable. A window opens with three maze
panels, one per algorithm, and a first maze is generated and solved shortly
after start-up. From there you can:

- set the maze size (5 to 50 rows and columns) and the start and goal cells;
  the start and goal are pulled back inside the maze when it shrinks,
- press **Generate & Solve Maze** to build a new maze and solve it with all
  three algorithms (start and goal must differ),
- use **Start All**, **Stop All** and **Reset All** to reveal the solution path
  cell by cell in every panel at once. Stopping shows the full solution,
  resetting shows the bare maze.

The results table lists, for each solver, whether a path was found, its cost,
the number of expanded nodes and the time taken in milliseconds. When all three
succeed, the last row names the fastest one.

Colours used in the panels:

| Colour    | Meaning                                  |
|-----------|------------------------------------------|
| blue      | start cell                               |
| red       | goal cell                                |
| yellow    | cell on the shortest path                |
| pink      | open cell; darker pink means higher cost |
| dark grey | wall                                     |

## Using the library

The generator and the solvers can be used without the window:

```python
import random

from mazecompare.maze import Point, generate_maze
from mazecompare.algorithms import solve_astar, solve_bucket, solve_dijkstra

rng = random.Random(42)
maze = generate_maze(15, 15, Point(0, 0), Point(14, 14), rng)

for solver in (solve_dijkstra, solve_bucket, solve_astar):
    result = solver(maze)
    print(solver.__name__, result.success, result.total_cost, result.nodes_expanded)
```

- `mazecompare.maze` — `CellType`, `Point`, `MazeData` and `generate_maze`.
  Start and goal are given in logical cell coordinates and stored on the maze in
  full grid coordinates (`2 * r + 1`, `2 * c + 1`). Out-of-range sizes or
  points raise `ValueError`.
- `mazecompare.algorithms` — the three solvers, `heuristic`, and
  `AlgorithmResult` (`success`, `total_cost`, `nodes_expanded`,
  `time_taken_ms`, `solution_grid`, `path`).
- `mazecompare.report` — `format_result_row` and `best_summary` build the
  table text; `clamp_endpoints` and `check_endpoints` validate settings.
- `mazecompare.visual` — `cell_color`, `compute_cell_layout`, `stats_caption`
  and `PathAnimation`, the drawing rules used by the panels.
- `mazecompare.app` — `solve_all` generates a maze and runs all three solvers
  in one call; `MazeSolverApp` and `MazeCanvas` are the Tk window and panels.

## What it does not do

Mazes live only in memory: there is no way to save or load a maze or its
results, and no text-only command that prints a comparison without opening the
window.

## Running the tests

```
pip install .[test]
pytest
```