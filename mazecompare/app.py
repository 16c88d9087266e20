"""Desktop window that generates a maze and compares three solvers side by side."""

from __future__ import annotations

import argparse
import random
from typing import Sequence

from .algorithms import AlgorithmResult, solve_astar, solve_bucket, solve_dijkstra
from .maze import CellType, MazeData, Point, generate_maze
from .report import (
    ALGORITHM_NAMES,
    BEST_ROW_NAME,
    DEFAULT_SIZE,
    SIZE_RANGE,
    TABLE_HEADERS,
    best_summary,
    check_endpoints,
    clamp_endpoints,
    format_result_row,
)
from .visual import (
    BACKGROUND_COLOR,
    GOAL_COLOR,
    SOLUTION_COLOR,
    START_COLOR,
    STEP_INTERVAL_MS,
    WALL_COLOR,
    PathAnimation,
    cell_color,
    compute_cell_layout,
    stats_caption,
)

try:
    import tkinter as tk
    from tkinter import messagebox, ttk
except ImportError:  # Tk support is optional in some Python builds.
    tk = None
    messagebox = None
    ttk = None

WINDOW_TITLE = "Maze Algorithm Comparison"
WINDOW_SIZE = "1600x900"
PANEL_TITLES = ("Dijkstra Algorithm", "Bucket/Stepping Algorithm", "A* Algorithm")

PANEL_COLOR = (220, 220, 220)
TEXT_COLOR = (60, 60, 60)
LEGEND_PATH_COLOR = (255, 180, 200)
SUCCESS_TEXT_COLOR = (0, 120, 0)
FAILURE_TEXT_COLOR = (180, 0, 0)
STEP_BOX_COLOR = (0, 100, 200)
NORMAL_ROW_COLOR = (250, 235, 235)
BEST_ROW_COLOR = (255, 245, 220)
INITIAL_SOLVE_DELAY_MS = 100


def _hex(color: tuple[int, int, int]) -> str:
    return "#{:02x}{:02x}{:02x}".format(*color)


def _require_tk() -> None:
    if tk is None:
        raise RuntimeError("this Python installation has no Tk support")


def solve_all(
    rows: int,
    cols: int,
    start: Point,
    goal: Point,
    rng: random.Random | None = None,
) -> tuple[MazeData, tuple[AlgorithmResult, AlgorithmResult, AlgorithmResult]]:
    """Generate a maze and solve it with Dijkstra, bucket queue and A*, in that order."""
    check_endpoints(start, goal)
    maze = generate_maze(rows, cols, start, goal, rng)
    return maze, (solve_dijkstra(maze), solve_bucket(maze), solve_astar(maze))


class MazeCanvas:
    """A panel that draws one maze, one solver's result and its path animation."""

    def __init__(self, parent, title: str) -> None:
        _require_tk()
        self.title = title
        self.maze: MazeData | None = None
        self.result = AlgorithmResult()
        self.animation: PathAnimation | None = None
        self.frame = tk.Frame(parent, background=_hex(PANEL_COLOR), padx=10, pady=10)
        self.canvas = tk.Canvas(
            self.frame,
            width=300,
            height=300,
            background=_hex(BACKGROUND_COLOR),
            highlightthickness=0,
        )
        self.canvas.pack(fill="both", expand=True)
        self.canvas.bind("<Configure>", lambda _event: self.redraw())

    def show(self, maze: MazeData, result: AlgorithmResult) -> None:
        """Display a maze with a solver's result; the path starts hidden."""
        self.maze = maze
        self.result = result
        self.animation = PathAnimation(maze.grid, result)
        self.animation.reset()
        self.redraw()

    def redraw(self) -> None:
        """Repaint the maze, the captions and the colour key."""
        canvas = self.canvas
        canvas.delete("all")
        width = max(canvas.winfo_width(), 1)
        height = max(canvas.winfo_height(), 1)
        canvas.create_rectangle(0, 0, width, height, fill=_hex(BACKGROUND_COLOR), outline="")

        maze = self.maze
        if maze is None or self.animation is None or not maze.grid or not maze.grid[0]:
            canvas.create_text(
                width // 2, height // 2, text="No maze data", fill=_hex(TEXT_COLOR)
            )
            return

        layout = compute_cell_layout(width, height, maze.full_rows, maze.full_cols)
        size = layout.cell_size
        weight_font = ("TkDefaultFont", 8 if size > 12 else 6)
        for r, (row, weights) in enumerate(zip(self.animation.display_grid, maze.weights)):
            y = layout.offset_y + r * size
            for c, (cell, weight) in enumerate(zip(row, weights)):
                x = layout.offset_x + c * size
                outline = TEXT_COLOR if cell == CellType.WALL else (200, 200, 200)
                canvas.create_rectangle(
                    x, y, x + size, y + size,
                    fill=_hex(cell_color(cell, weight)),
                    outline=_hex(outline),
                )
                if size > 8 and cell in (CellType.PATH, CellType.SHORTEST_PATH):
                    canvas.create_text(
                        x + size / 2, y + size / 2,
                        text=str(weight), fill=_hex(WALL_COLOR), font=weight_font,
                    )

        self._draw_captions()
        self._draw_color_key(height)

        if self.animation.running:
            canvas.create_rectangle(
                width - 160, 5, width - 10, 30,
                outline=_hex(STEP_BOX_COLOR), fill="#ffffff",
            )
            canvas.create_text(
                width - 155, 22, text=self.animation.caption,
                anchor="sw", fill=_hex(STEP_BOX_COLOR),
            )

    def _draw_captions(self) -> None:
        self.canvas.create_text(
            10, 20, text=self.title, anchor="sw",
            fill=_hex(TEXT_COLOR), font=("TkDefaultFont", 10, "bold"),
        )
        caption = stats_caption(self.result)
        if caption is not None:
            color = SUCCESS_TEXT_COLOR if self.result.success else FAILURE_TEXT_COLOR
            self.canvas.create_text(
                10, 35, text=caption, anchor="sw",
                fill=_hex(color), font=("TkDefaultFont", 9),
            )

    def _draw_color_key(self, height: int) -> None:
        canvas = self.canvas
        x, y = 10, height - 85
        text = _hex(TEXT_COLOR)
        canvas.create_text(
            x, y - 5, text="Color Coding:", anchor="sw",
            fill=text, font=("TkDefaultFont", 8, "bold"),
        )
        entries = (
            (0, 0, START_COLOR, "Start"),
            (60, 0, GOAL_COLOR, "Goal"),
            (0, 15, SOLUTION_COLOR, "Solution"),
            (60, 15, LEGEND_PATH_COLOR, "Path"),
            (0, 30, WALL_COLOR, "Wall"),
        )
        for dx, dy, color, label in entries:
            canvas.create_rectangle(
                x + dx, y + dy, x + dx + 10, y + dy + 10, fill=_hex(color), outline=text
            )
            canvas.create_text(
                x + dx + 13, y + dy + 9, text=label, anchor="sw",
                fill=text, font=("TkDefaultFont", 8),
            )
        canvas.create_text(
            x, y + 50, text="Dark Pink = High Cost", anchor="sw",
            fill=_hex((100, 100, 100)), font=("TkDefaultFont", 8),
        )


class MazeSolverApp:
    """Main window: maze settings, three solver panels and the comparison table."""

    def __init__(self, root=None, rng: random.Random | None = None) -> None:
        _require_tk()
        self.root = root if root is not None else tk.Tk()
        self.rng = rng if rng is not None else random.Random()
        self.maze: MazeData | None = None
        self.results: tuple[AlgorithmResult, ...] = ()
        self._tick_id = None
        self._build()
        self.root.after(INITIAL_SOLVE_DELAY_MS, self.generate_and_solve)

    def _build(self) -> None:
        root = self.root
        root.configure(background=_hex((255, 228, 225)))

        tk.Label(
            root, text=WINDOW_TITLE, font=("TkDefaultFont", 18, "bold"),
            foreground=_hex(TEXT_COLOR), background=_hex((255, 228, 225)),
        ).pack(fill="x", padx=10, pady=(10, 5))

        mazes = tk.Frame(root, background=_hex((255, 228, 225)))
        mazes.pack(fill="both", expand=True, padx=10, pady=5)
        self.canvases = []
        for column, title in enumerate(PANEL_TITLES):
            panel = MazeCanvas(mazes, title)
            panel.frame.grid(row=0, column=column, sticky="nsew", padx=7)
            mazes.columnconfigure(column, weight=1)
            self.canvases.append(panel)
        mazes.rowconfigure(0, weight=1)

        controls = tk.Frame(root, background=_hex((255, 228, 225)))
        controls.pack(fill="x", padx=10, pady=5)
        self._build_config(controls)
        self._build_visual_controls(controls)
        self._build_table(controls)

        status = tk.Frame(root, background=_hex(PANEL_COLOR), padx=15, pady=8)
        status.pack(fill="x", padx=10, pady=(10, 10))
        tk.Label(status, text="Ready", background=_hex(PANEL_COLOR),
                 foreground=_hex((80, 80, 80))).pack(side="left")
        tk.Label(status, text="Maze Algorithm Comparison Tool", background=_hex(PANEL_COLOR),
                 foreground=_hex((120, 120, 120))).pack(side="right")

    def _spinbox(self, parent, row: int, label: str, low: int, high: int, value: int):
        tk.Label(parent, text=label, background=_hex(PANEL_COLOR),
                 foreground=_hex(TEXT_COLOR)).grid(row=row, column=0, sticky="w", pady=2)
        var = tk.IntVar(value=value)
        box = tk.Spinbox(parent, from_=low, to=high, textvariable=var, width=6)
        box.grid(row=row, column=1, sticky="w", pady=2)
        return var, box

    def _build_config(self, parent) -> None:
        group = tk.LabelFrame(parent, text="Maze Configuration", background=_hex(PANEL_COLOR),
                              foreground=_hex(TEXT_COLOR), padx=10, pady=10)
        group.pack(side="left", fill="y", padx=(0, 15))
        low, high = SIZE_RANGE
        last = DEFAULT_SIZE - 1
        self.rows_var, _ = self._spinbox(group, 0, "Rows:", low, high, DEFAULT_SIZE)
        self.cols_var, _ = self._spinbox(group, 1, "Columns:", low, high, DEFAULT_SIZE)
        self.start_row_var, self.start_row_box = self._spinbox(group, 2, "Start Row:", 0, last, 0)
        self.start_col_var, self.start_col_box = self._spinbox(group, 3, "Start Column:", 0, last, 0)
        self.goal_row_var, self.goal_row_box = self._spinbox(group, 4, "Goal Row:", 0, last, last)
        self.goal_col_var, self.goal_col_box = self._spinbox(group, 5, "Goal Column:", 0, last, last)
        self.rows_var.trace_add("write", lambda *_: self._update_ranges())
        self.cols_var.trace_add("write", lambda *_: self._update_ranges())
        tk.Button(group, text="Generate & Solve Maze", background="#4CAF50", foreground="white",
                  command=self.generate_and_solve).grid(row=6, column=0, columnspan=2,
                                                        sticky="ew", pady=(8, 0))

    def _build_visual_controls(self, parent) -> None:
        group = tk.LabelFrame(parent, text="Visualization Controls", background=_hex(PANEL_COLOR),
                              foreground=_hex(TEXT_COLOR), padx=10, pady=10)
        group.pack(side="left", fill="y", padx=(0, 15))
        tk.Label(group, text="Visualize All Algorithms", background=_hex(PANEL_COLOR),
                 foreground=_hex(TEXT_COLOR)).pack(fill="x", pady=(0, 5))
        self.start_button = tk.Button(group, text="▶ Start All", background="#2196F3",
                                      foreground="white", state="disabled",
                                      command=self.start_visualization)
        self.stop_button = tk.Button(group, text="⏹ Stop All", background="#f44336",
                                     foreground="white", state="disabled",
                                     command=self.stop_visualization)
        self.reset_button = tk.Button(group, text="↺ Reset All", background="#FF9800",
                                      foreground="white", state="disabled",
                                      command=self.reset_visualization)
        for button in (self.start_button, self.stop_button, self.reset_button):
            button.pack(fill="x", pady=3)

    def _build_table(self, parent) -> None:
        group = tk.LabelFrame(parent, text="Algorithm Comparison Results",
                              background=_hex(PANEL_COLOR), foreground=_hex(TEXT_COLOR),
                              padx=10, pady=10)
        group.pack(side="left", fill="both", expand=True)
        self.table = ttk.Treeview(group, columns=TABLE_HEADERS, show="headings", height=4)
        for heading, width in zip(TABLE_HEADERS, (120, 70, 80, 80, 120)):
            self.table.heading(heading, text=heading)
            self.table.column(heading, width=width, anchor="center")
        self.table.tag_configure("normal", background=_hex(NORMAL_ROW_COLOR))
        self.table.tag_configure("best", background=_hex(BEST_ROW_COLOR))
        self.table_rows = [
            self.table.insert("", "end", values=(name, "", "", "", ""), tags=("normal",))
            for name in ALGORITHM_NAMES
        ]
        self.table_rows.append(
            self.table.insert("", "end", values=(BEST_ROW_NAME, "", "", "", ""), tags=("best",))
        )
        self.table.pack(fill="both", expand=True)

    def _read(self, var) -> int | None:
        try:
            return int(var.get())
        except (tk.TclError, ValueError):
            return None

    def _update_ranges(self) -> None:
        rows, cols = self._read(self.rows_var), self._read(self.cols_var)
        if rows is None or cols is None:
            return
        for box in (self.start_row_box, self.goal_row_box):
            box.configure(to=rows - 1)
        for box in (self.start_col_box, self.goal_col_box):
            box.configure(to=cols - 1)
        values = [self._read(v) for v in (self.start_row_var, self.start_col_var,
                                          self.goal_row_var, self.goal_col_var)]
        if None in values:
            return
        start, goal = clamp_endpoints(rows, cols, Point(values[0], values[1]),
                                      Point(values[2], values[3]))
        self.start_row_var.set(start.r)
        self.start_col_var.set(start.c)
        self.goal_row_var.set(goal.r)
        self.goal_col_var.set(goal.c)

    def generate_and_solve(self) -> None:
        """Build a new maze from the settings, solve it three ways and show the results."""
        values = [self._read(v) for v in (self.rows_var, self.cols_var, self.start_row_var,
                                          self.start_col_var, self.goal_row_var,
                                          self.goal_col_var)]
        if None in values:
            messagebox.showwarning("Invalid Configuration", "All settings must be whole numbers.")
            return
        rows, cols, sr, sc, gr, gc = values
        try:
            check_endpoints(Point(sr, sc), Point(gr, gc))
        except ValueError as error:
            messagebox.showwarning("Invalid Configuration", str(error))
            return

        self.stop_visualization()
        try:
            self.maze, self.results = solve_all(rows, cols, Point(sr, sc), Point(gr, gc), self.rng)
        except ValueError as error:
            messagebox.showwarning("Invalid Configuration", str(error))
            return

        for panel, result in zip(self.canvases, self.results):
            panel.show(self.maze, result)
        self._update_table()
        self.start_button.configure(state="normal")
        self.reset_button.configure(state="normal")

    def _update_table(self) -> None:
        summary = best_summary(self.results)
        for item, name, result in zip(self.table_rows, ALGORITHM_NAMES, self.results):
            tag = "best" if summary.best_index is not None and \
                self.table_rows[summary.best_index] == item else "normal"
            self.table.item(item, values=format_result_row(name, result).cells(), tags=(tag,))
        self.table.item(self.table_rows[-1], values=summary.cells(), tags=("best",))

    def _animations(self) -> list[PathAnimation]:
        return [panel.animation for panel in self.canvases if panel.animation is not None]

    def _cancel_tick(self) -> None:
        if self._tick_id is not None:
            self.root.after_cancel(self._tick_id)
            self._tick_id = None

    def _tick(self) -> None:
        self._tick_id = None
        still_running = False
        for panel in self.canvases:
            if panel.animation is not None and panel.animation.running:
                panel.animation.step()
                still_running = still_running or panel.animation.running
                panel.redraw()
        if still_running:
            self._tick_id = self.root.after(STEP_INTERVAL_MS, self._tick)

    def start_visualization(self) -> None:
        """Animate every solver's path from the beginning, all at once."""
        self.stop_visualization()
        for animation in self._animations():
            animation.start()
        for panel in self.canvases:
            panel.redraw()
        self._tick_id = self.root.after(STEP_INTERVAL_MS, self._tick)
        self.start_button.configure(state="disabled")
        self.stop_button.configure(state="normal")
        self.reset_button.configure(state="normal")

    def stop_visualization(self) -> None:
        """Halt every animation and show the full solutions."""
        self._cancel_tick()
        for animation in self._animations():
            animation.stop()
        for panel in self.canvases:
            panel.redraw()
        self.start_button.configure(state="normal")
        self.stop_button.configure(state="disabled")
        self.reset_button.configure(state="normal")

    def reset_visualization(self) -> None:
        """Halt every animation and show the bare mazes."""
        self._cancel_tick()
        for animation in self._animations():
            animation.reset()
        for panel in self.canvases:
            panel.redraw()
        self.start_button.configure(state="normal")
        self.stop_button.configure(state="disabled")


def main(argv: Sequence[str] | None = None) -> int:
    """Open the comparison window and run until it is closed."""
    parser = argparse.ArgumentParser(
        prog="mazecompare",
        description="Generate random weighted mazes and compare shortest-path solvers.",
    )
    parser.add_argument("--seed", type=int, default=None, help="seed for maze generation")
    args = parser.parse_args(argv)
    _require_tk()
    root = tk.Tk()
    root.title(WINDOW_TITLE)
    root.geometry(WINDOW_SIZE)
    MazeSolverApp(root, random.Random(args.seed))
    root.mainloop()
    return 0