"""Integer point helpers for 2D and 3D puzzle spaces.

Coordinates follow text-grid conventions: ``x`` is the column, ``y`` is
the row, and ``y`` grows downward (``south`` is ``y + 1``).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable


def abs_diff(a: int, b: int) -> int:
    """Return ``|a - b|``."""
    v = a - b
    return -v if v < 0 else v


@dataclass(frozen=True, order=True)
class Pt2:
    """An immutable 2D integer point."""

    x: int
    y: int

    def __add__(self, other: Pt2) -> Pt2:
        return Pt2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Pt2) -> Pt2:
        return Pt2(self.x - other.x, self.y - other.y)

    def mdist(self, other: Pt2) -> int:
        """Return the Manhattan distance between this point and *other*."""
        return abs_diff(self.x, other.x) + abs_diff(self.y, other.y)

    def toward(self, target: Pt2) -> Pt2:
        """Step at most one unit along X and one along Y toward *target*.

        Each axis moves independently, and only when *target* differs on
        that axis.
        """
        x, y = self.x, self.y
        if target.x < x:
            x -= 1
        elif target.x > x:
            x += 1
        if target.y < y:
            y -= 1
        elif target.y > y:
            y += 1
        return Pt2(x, y)

    def for_neighbors(self, visit: Callable[[Pt2], bool]) -> None:
        """Call *visit* for each of the 8 surrounding points.

        Points are visited row by row over the 3x3 block around this point,
        skipping the centre.  Iteration stops as soon as *visit* returns a
        falsy value.
        """
        for dy in (-1, 0, 1):
            for dx in (-1, 0, 1):
                if dx == 0 and dy == 0:
                    continue
                if not visit(Pt2(self.x + dx, self.y + dy)):
                    return

    def neighbors(self) -> list[Pt2]:
        """Return the 8 surrounding points in :meth:`for_neighbors` order."""
        out: list[Pt2] = []

        def collect(p: Pt2) -> bool:
            out.append(p)
            return True

        self.for_neighbors(collect)
        return out

    def north(self) -> Pt2:
        return Pt2(self.x, self.y - 1)

    def south(self) -> Pt2:
        return Pt2(self.x, self.y + 1)

    def west(self) -> Pt2:
        return Pt2(self.x - 1, self.y)

    def east(self) -> Pt2:
        return Pt2(self.x + 1, self.y)


@dataclass(frozen=True, order=True)
class Pt3:
    """An immutable 3D integer point."""

    x: int
    y: int
    z: int

    def __add__(self, other: Pt3) -> Pt3:
        return Pt3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Pt3) -> Pt3:
        return Pt3(self.x - other.x, self.y - other.y, self.z - other.z)

    def mdist(self, other: Pt3) -> int:
        return (
            abs_diff(self.x, other.x)
            + abs_diff(self.y, other.y)
            + abs_diff(self.z, other.z)
        )


Pt = Pt2


def manhattan_distance(a: Pt2 | Pt3, b: Pt2 | Pt3) -> int:
    """Return the Manhattan distance between two points of the same kind."""
    if type(a) is not type(b):
        raise TypeError(f"cannot measure between {type(a).__name__} and {type(b).__name__}")
    return a.mdist(b)  # type: ignore[arg-type]


# Direction step functions, starting at north.
NORTH_CLOCKWISE: tuple[Callable[[Pt2], Pt2], ...] = (
    Pt2.north,
    Pt2.east,
    Pt2.south,
    Pt2.west,
)

NORTH_COUNTER_CLOCKWISE: tuple[Callable[[Pt2], Pt2], ...] = (
    Pt2.north,
    Pt2.west,
    Pt2.south,
    Pt2.east,
)
