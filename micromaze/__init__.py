"""Depth-first and breadth-first micromouse solvers for a line-protocol maze simulator."""

__version__ = "0.1.0"