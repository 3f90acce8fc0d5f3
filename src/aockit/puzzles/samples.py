"""Sample tables: the expected answer and sample input for each puzzle.

Samples can be declared explicitly when a puzzle is registered, or
harvested from the docstrings of a puzzle module.  A docstring declares a
sample with a ``want=`` line, optionally followed by the sample input::

    def day7(inp):
        '''Count the lines.

        want=3
        x
        y
        z
        '''

A ``want=`` line with nothing after it reuses the sample input of the
closest earlier function that declared one, so consecutive parts of the
same day only spell out their shared input once.
"""

from __future__ import annotations

import ast
import inspect
import logging
import re
from dataclasses import dataclass
from pathlib import Path
from types import ModuleType
from typing import Iterator

logger = logging.getLogger(__name__)

_WANT_RX = re.compile(r"^[ \t]*want=(?P<want>[^\n]*)$", re.MULTILINE)


@dataclass(frozen=True)
class Sample:
    """Expected answer for a puzzle run against ``input``."""

    want: str
    input: str


class SampleTable:
    """Puzzle name → :class:`Sample`."""

    def __init__(self, samples: dict[str, Sample] | None = None) -> None:
        self._samples: dict[str, Sample] = dict(samples or {})

    def add(self, name: str, want: object, sample_input: str) -> Sample:
        """Record a sample for *name*, replacing any previous one."""
        sample = Sample(want=str(want), input=sample_input)
        self._samples[name] = sample
        return sample

    def get(self, name: str) -> Sample | None:
        return self._samples.get(name)

    def merge(self, other: SampleTable, *, replace: bool = False) -> None:
        """Copy samples from *other*; existing entries win unless *replace*."""
        for name, sample in other.items():
            if replace or name not in self._samples:
                self._samples[name] = sample

    def items(self) -> Iterator[tuple[str, Sample]]:
        return iter(self._samples.items())

    def names(self) -> list[str]:
        return list(self._samples)

    def __contains__(self, name: object) -> bool:
        return name in self._samples

    def __len__(self) -> int:
        return len(self._samples)

    def __repr__(self) -> str:
        return f"SampleTable({sorted(self._samples)})"


# ---------------------------------------------------------------------------
# Docstring extraction
# ---------------------------------------------------------------------------


def _strip_blank_edges(text: str) -> str:
    lines = text.split("\n")
    while lines and not lines[0].strip():
        lines.pop(0)
    while lines and not lines[-1].strip():
        lines.pop()
    return "\n".join(lines) + "\n" if lines else ""


def parse_docstring(doc: str) -> tuple[str, str] | None:
    """Return ``(want, sample_input)`` declared in *doc*, or ``None``.

    ``sample_input`` is empty when nothing follows the ``want=`` line;
    otherwise it is the remaining docstring text with blank leading and
    trailing lines removed and a single trailing newline.
    """
    text = inspect.cleandoc(doc)
    m = _WANT_RX.search(text)
    if m is None:
        return None
    want = m.group("want").rstrip()
    return want, _strip_blank_edges(text[m.end():])


def extract_samples(source: str, filename: str = "<puzzles>") -> SampleTable:
    """Statically scan top-level function docstrings in *source*.

    Functions are visited in declaration order.  Raises ``SyntaxError`` if
    *source* is not valid Python.
    """
    tree = ast.parse(source, filename=filename)
    table = SampleTable()
    last_input = ""
    for node in tree.body:
        if not isinstance(node, (ast.FunctionDef, ast.AsyncFunctionDef)):
            continue
        doc = ast.get_docstring(node, clean=False)
        if not doc:
            continue
        parsed = parse_docstring(doc)
        if parsed is None:
            continue
        want, sample_input = parsed
        sample_input = sample_input or last_input
        table.add(node.name, want, sample_input)
        last_input = sample_input
        logger.debug("Sample for %s: want=%s (%d bytes input)", node.name, want, len(sample_input))
    return table


def samples_from_path(path: Path) -> SampleTable:
    """Extract samples from the Python file at *path*."""
    return extract_samples(path.read_text(encoding="utf-8"), filename=str(path))


def samples_from_module(module: ModuleType) -> SampleTable:
    """Extract samples from the source of an imported *module*."""
    filename = getattr(module, "__file__", None) or module.__name__
    return extract_samples(inspect.getsource(module), filename=filename)
