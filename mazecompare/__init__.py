"""Weighted maze generation, three shortest-path solvers and a Tk window comparing them."""

__version__ = "0.1.0"

__all__ = ["__version__"]