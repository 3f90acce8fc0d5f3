"""Puzzle registry: name to puzzle function, in registration order.

A puzzle is any callable taking a :class:`~aockit.inputs.lines.PuzzleInput`
and returning something printable.  Its key defaults to the function's
own ``__name__``; the day number is the first run of digits in that key,
so ``day7`` and ``day7b`` both solve day 7.

Typical use from a puzzle script::

    from aockit import puzzle, main

    @puzzle(want=3, sample="x\\ny\\nz\\n")
    def day7(inp):
        return len(inp.lines())

    if __name__ == "__main__":
        main()
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from types import ModuleType
from typing import TYPE_CHECKING, Any, Callable

from aockit.errors import MissingDayError, UnknownPuzzleError
from aockit.puzzles.samples import Sample, SampleTable, extract_samples, samples_from_module

if TYPE_CHECKING:
    from aockit.inputs.lines import PuzzleInput

logger = logging.getLogger(__name__)

PuzzleFunc = Callable[["PuzzleInput"], Any]

_DIGITS_RX = re.compile(r"\d+")


def day_from_name(name: str) -> int:
    """Return the day encoded by the first run of digits in *name*."""
    m = _DIGITS_RX.search(name)
    if m is None:
        raise MissingDayError(name)
    return int(m.group(0))


@dataclass(frozen=True)
class Puzzle:
    """A registered puzzle function."""

    name: str
    func: PuzzleFunc

    @property
    def day(self) -> int:
        return day_from_name(self.name)

    def __call__(self, puzzle_input: PuzzleInput) -> Any:
        return self.func(puzzle_input)


class PuzzleRegistry:
    """Ordered registry of puzzles and their samples.

    Built once at startup, then handed to the runner for dispatch.

    Parameters
    ----------
    day_prefix:
        Prepended to identifiers starting with a digit.  Defaults to the
        configured ``day_prefix`` setting.
    """

    def __init__(self, day_prefix: str | None = None) -> None:
        if day_prefix is None:
            from aockit.config.settings import get_settings

            day_prefix = get_settings().day_prefix
        self.day_prefix = day_prefix
        self._puzzles: dict[str, Puzzle] = {}
        self.samples = SampleTable()
        self._last_input = ""

    def register(
        self,
        func: PuzzleFunc,
        *,
        name: str | None = None,
        want: object = None,
        sample: str | None = None,
    ) -> Puzzle:
        """Register *func* under *name* (default: its ``__name__``).

        Passing *want* attaches a sample; *sample* is its input text.  When
        *want* is given without *sample*, the sample input of the most
        recently declared sample is reused.
        """
        key = name or func.__name__
        entry = Puzzle(name=key, func=func)
        self._puzzles[key] = entry
        if want is not None:
            if sample is None:
                sample = self._last_input
            self.samples.add(key, want, sample)
            self._last_input = sample
        logger.debug("Registered puzzle: %s", key)
        return entry

    def puzzle(
        self,
        func: PuzzleFunc | None = None,
        *,
        name: str | None = None,
        want: object = None,
        sample: str | None = None,
    ) -> Any:
        """Decorator form of :meth:`register`; returns the function unchanged.

        Usable bare (``@registry.puzzle``) or with arguments
        (``@registry.puzzle(want=3, sample="...")``).
        """

        def decorate(f: PuzzleFunc) -> PuzzleFunc:
            self.register(f, name=name, want=want, sample=sample)
            return f

        if func is not None:
            return decorate(func)
        return decorate

    def add(self, *funcs: PuzzleFunc) -> None:
        """Register several functions by their own names."""
        for f in funcs:
            self.register(f)

    # -- samples ------------------------------------------------------------

    def load_samples(self, source: str | ModuleType) -> int:
        """Harvest docstring samples from puzzle source text or a module.

        Samples declared at registration time are kept, and functions that
        are not registered are ignored.  Returns the number of samples added.
        """
        if isinstance(source, ModuleType):
            table = samples_from_module(source)
        else:
            table = extract_samples(source)
        registered = SampleTable(
            {name: sample for name, sample in table.items() if name in self._puzzles}
        )
        before = len(self.samples)
        self.samples.merge(registered)
        added = len(self.samples) - before
        logger.debug("Loaded %d docstring samples (%d new)", len(table), added)
        return added

    def sample_for(self, name: str) -> Sample | None:
        return self.samples.get(name)

    # -- lookup -------------------------------------------------------------

    def puzzles(self) -> list[Puzzle]:
        """Registered puzzles, oldest first."""
        return list(self._puzzles.values())

    def names(self) -> list[str]:
        """Registered names, oldest first."""
        return list(self._puzzles)

    def latest(self) -> str:
        """Name of the most recently registered puzzle."""
        if not self._puzzles:
            raise UnknownPuzzleError("")
        return next(reversed(self._puzzles))

    def get(self, name: str) -> Puzzle | None:
        return self._puzzles.get(name)

    def normalize(self, identifier: str | None) -> str:
        """Expand *identifier* to a registry key.

        Empty means the latest puzzle; a leading digit gets the day prefix.
        """
        if not identifier:
            return self.latest()
        if identifier[0].isdigit():
            return self.day_prefix + identifier
        return identifier

    def resolve(self, identifier: str | None) -> Puzzle:
        """Look up *identifier* (case-sensitive) after :meth:`normalize`."""
        name = self.normalize(identifier)
        entry = self._puzzles.get(name)
        if entry is None:
            raise UnknownPuzzleError(name, self.names())
        return entry

    def __contains__(self, name: object) -> bool:
        return name in self._puzzles

    def __len__(self) -> int:
        return len(self._puzzles)


# Module-level registry used by the ``puzzle`` decorator shortcut.
_registry: PuzzleRegistry | None = None


def get_registry() -> PuzzleRegistry:
    """Return the default registry singleton."""
    global _registry  # noqa: PLW0603
    if _registry is None:
        _registry = PuzzleRegistry()
    return _registry


def reset_registry() -> None:
    """Drop the default registry; the next :func:`get_registry` builds a new one."""
    global _registry  # noqa: PLW0603
    _registry = None


def puzzle(
    func: PuzzleFunc | None = None,
    *,
    name: str | None = None,
    want: object = None,
    sample: str | None = None,
) -> Any:
    """Register on the default registry; see :meth:`PuzzleRegistry.puzzle`."""
    return get_registry().puzzle(func, name=name, want=want, sample=sample)
