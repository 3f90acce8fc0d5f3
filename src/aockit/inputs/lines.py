"""Line scanning over puzzle input, plus small parsing helpers.

:class:`PuzzleInput` is what every puzzle receives: the day number and
the raw bytes it should solve, whether those come from a sample or from
the real input file.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Iterator, TypeVar

from aockit.errors import InputDecodeError

if TYPE_CHECKING:
    from aockit.geometry.grid import Grid

T = TypeVar("T")


def _decode(data: bytes) -> str:
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise InputDecodeError(f"input is not valid UTF-8: {exc}") from exc


def iter_lines(data: bytes) -> Iterator[str]:
    """Yield each line of *data* in file order, without line terminators.

    Lines end at a newline character, and one trailing carriage return is
    dropped from each.  A trailing newline does not produce an extra empty
    line.  No other character separates lines.
    """
    pieces = _decode(data).split("\n")
    if pieces[-1] == "":
        pieces.pop()
    for line in pieces:
        yield line[:-1] if line.endswith("\r") else line


def for_each_line(data: bytes, visit: Callable[[str], object]) -> None:
    """Call ``visit(line)`` for each line of *data*."""
    for line in iter_lines(data):
        visit(line)


def for_each_line_indexed(data: bytes, visit: Callable[[int, str], object]) -> None:
    """Call ``visit(y, line)`` for each line of *data*; ``y`` starts at 0."""
    for y, line in enumerate(iter_lines(data)):
        visit(y, line)


# ---------------------------------------------------------------------------
# Parsing helpers
# ---------------------------------------------------------------------------


def to_int(s: str) -> int:
    """Parse a decimal integer, surrounding whitespace allowed."""
    return int(s.strip())


def digit_value(ch: str) -> int:
    """Return the value of a single ASCII digit character."""
    if len(ch) == 1 and "0" <= ch <= "9":
        return ord(ch) - ord("0")
    raise ValueError(f"bogus digit {ch!r}")


def first_truthy(*values: T) -> T | None:
    """Return the first truthy value, or ``None`` if there is none."""
    for v in values:
        if v:
            return v
    return None


# ---------------------------------------------------------------------------
# Puzzle input
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class PuzzleInput:
    """Input handed to a puzzle for one invocation."""

    day: int
    data: bytes

    @classmethod
    def from_text(cls, day: int, text: str) -> PuzzleInput:
        return cls(day=day, data=text.encode("utf-8"))

    @property
    def text(self) -> str:
        return _decode(self.data)

    def lines(self) -> list[str]:
        return list(iter_lines(self.data))

    def for_each_line(self, visit: Callable[[str], object]) -> None:
        for_each_line(self.data, visit)

    def for_each_line_indexed(self, visit: Callable[[int, str], object]) -> None:
        for_each_line_indexed(self.data, visit)

    def grid(self) -> Grid:
        """Parse the whole input as a character grid."""
        from aockit.geometry.grid import read_grid

        return read_grid(self)
