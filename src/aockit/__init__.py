"""aockit: helpers for solving daily puzzle exercises.

Fetches puzzle input (local cache first, authenticated download second),
parses it into lines and sparse character grids, offers small 2D/3D point
helpers, and runs registered puzzles against their sample before the real
input.
"""

from __future__ import annotations

__version__ = "0.1.0"

from aockit.geometry.grid import Grid, read_grid
from aockit.geometry.points import NORTH_CLOCKWISE, NORTH_COUNTER_CLOCKWISE, Pt, Pt2, Pt3
from aockit.inputs.lines import PuzzleInput, digit_value, first_truthy, to_int
from aockit.puzzles.registry import PuzzleRegistry, get_registry, puzzle
from aockit.cli import main

__all__ = [
    "__version__",
    "Grid",
    "NORTH_CLOCKWISE",
    "NORTH_COUNTER_CLOCKWISE",
    "Pt",
    "Pt2",
    "Pt3",
    "PuzzleInput",
    "PuzzleRegistry",
    "digit_value",
    "first_truthy",
    "get_registry",
    "main",
    "puzzle",
    "read_grid",
    "to_int",
]
