"""Sparse character grids built from line-oriented puzzle text.

A :class:`Grid` maps :class:`~aockit.geometry.points.Pt2` coordinates to
single characters.  Whitespace is never stored, so an absent key simply
means "nothing at that cell".
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterable

import numpy as np

from aockit.geometry.points import Pt2

if TYPE_CHECKING:
    from aockit.inputs.lines import PuzzleInput

logger = logging.getLogger(__name__)

PLACEHOLDER = "?"


class Grid(dict[Pt2, str]):
    """Mapping of ``Pt2(column, row)`` to the character found there."""

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> Grid:
        """Build a grid from lines, row ``y`` being the line index."""
        grid = cls()
        for y, line in enumerate(lines):
            for x, ch in enumerate(line):
                if ch.isspace():
                    continue
                grid[Pt2(x, y)] = ch
        return grid

    @classmethod
    def from_string(cls, text: str) -> Grid:
        """Build a grid from newline-separated text."""
        return cls.from_lines(text.split("\n"))

    def positions_with_value(self, ch: str) -> set[Pt2]:
        """Return every coordinate holding *ch*."""
        return {p for p, v in self.items() if v == ch}

    def bounds(self) -> tuple[int, int, int, int]:
        """Return ``(min_x, min_y, max_x, max_y)`` over populated cells.

        Raises
        ------
        ValueError
            If the grid is empty; bounds are meaningless without cells.
        """
        if not self:
            raise ValueError("bounds of an empty grid")
        xs = [p.x for p in self]
        ys = [p.y for p in self]
        return min(xs), min(ys), max(xs), max(ys)

    def render(self, placeholder: str = PLACEHOLDER) -> str:
        """Render the bounding rectangle, one text row per grid row.

        Cells inside the rectangle with no content show *placeholder*.
        """
        min_x, min_y, max_x, max_y = self.bounds()
        return "\n".join(
            "".join(self.get(Pt2(x, y), placeholder) for x in range(min_x, max_x + 1))
            for y in range(min_y, max_y + 1)
        )

    def draw(self, placeholder: str = PLACEHOLDER) -> None:
        """Print :meth:`render` to stdout."""
        print(self.render(placeholder))

    def to_array(self, placeholder: str = PLACEHOLDER) -> np.ndarray:
        """Return the bounding rectangle as a dense ``(rows, cols)`` array.

        ``arr[r, c]`` is the cell at ``Pt2(min_x + c, min_y + r)``.
        """
        min_x, min_y, max_x, max_y = self.bounds()
        arr = np.full((max_y - min_y + 1, max_x - min_x + 1), placeholder, dtype="<U1")
        for p, ch in self.items():
            arr[p.y - min_y, p.x - min_x] = ch
        return arr


def read_grid(puzzle_input: PuzzleInput) -> Grid:
    """Build a grid from every line of *puzzle_input*."""
    grid = Grid.from_lines(puzzle_input.lines())
    logger.debug("Read grid with %d cells for day %d", len(grid), puzzle_input.day)
    return grid
