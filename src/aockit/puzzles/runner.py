"""Sample-checked puzzle execution.

For one invocation the runner moves through::

    Idle -> Dispatching -> (SampleChecking)? -> RunningReal -> Done

Dispatching fails on an unknown identifier or one without a day number.
SampleChecking fails when the puzzle's answer for its sample differs from
the expected value.  Errors raised by the puzzle itself propagate as-is.
"""

from __future__ import annotations

import enum
import logging
import sys
from dataclasses import dataclass
from typing import Any, Callable

from aockit.errors import SampleMismatchError
from aockit.inputs.lines import PuzzleInput
from aockit.inputs.provider import InputProvider
from aockit.puzzles.registry import Puzzle, PuzzleRegistry, day_from_name

logger = logging.getLogger(__name__)


class RunState(str, enum.Enum):
    IDLE = "idle"
    DISPATCHING = "dispatching"
    SAMPLE_CHECKING = "sample_checking"
    RUNNING_REAL = "running_real"
    DONE = "done"


class SampleStatus(str, enum.Enum):
    PASSED = "passed"
    FAILED = "failed"
    MISSING = "missing"


@dataclass
class SampleResult:
    """Outcome of running a puzzle against its sample."""

    name: str
    status: SampleStatus
    got: str = ""
    want: str = ""

    @property
    def ok(self) -> bool:
        return self.status is not SampleStatus.FAILED


@dataclass
class RunOutcome:
    """Everything one :meth:`PuzzleRunner.run` produced."""

    name: str
    day: int
    sample: SampleResult
    result: Any

    @property
    def answer(self) -> str:
        return stringify(self.result)


def stringify(value: Any) -> str:
    """Render a puzzle result the way it is printed and compared."""
    return str(value)


def _stderr(message: str) -> None:
    print(message, file=sys.stderr)


class PuzzleRunner:
    """Dispatch puzzles from a registry and check them against samples.

    Parameters
    ----------
    registry:
        Registry holding puzzles and their samples.
    provider:
        Resolves real input for the puzzle's day.
    diagnostic:
        Receives sample pass/fail/missing messages.  Defaults to stderr.
    """

    def __init__(
        self,
        registry: PuzzleRegistry,
        provider: InputProvider | None = None,
        diagnostic: Callable[[str], None] | None = None,
    ) -> None:
        self.registry = registry
        self.provider = provider or InputProvider()
        self.diagnostic = diagnostic or _stderr
        self.state = RunState.IDLE

    def dispatch(self, identifier: str | None) -> tuple[Puzzle, int]:
        """Resolve *identifier* to a puzzle and its day number."""
        self.state = RunState.DISPATCHING
        entry = self.registry.resolve(identifier)
        day = day_from_name(entry.name)
        logger.debug("Dispatching %s (day %d)", entry.name, day)
        return entry, day

    def check_sample(self, entry: Puzzle, day: int) -> SampleResult:
        """Run *entry* against its sample, if it has one.

        The sample input replaces real input for this call only.
        """
        sample = self.registry.sample_for(entry.name)
        if sample is None:
            self.diagnostic(f"⚠️ no sample for {entry.name}")
            logger.debug("No sample for %s", entry.name)
            return SampleResult(name=entry.name, status=SampleStatus.MISSING)

        self.state = RunState.SAMPLE_CHECKING
        data = self.provider.resolve(day, override=sample.input.encode("utf-8"))
        got = stringify(entry(PuzzleInput(day=day, data=data)))
        if got != sample.want:
            self.diagnostic(f"❌ for {entry.name} sample, got={got}; want {sample.want}")
            return SampleResult(
                name=entry.name, status=SampleStatus.FAILED, got=got, want=sample.want,
            )
        self.diagnostic("OK sample result.")
        logger.info("Sample passed for %s: %s", entry.name, got)
        return SampleResult(name=entry.name, status=SampleStatus.PASSED, got=got, want=sample.want)

    def run_real(self, entry: Puzzle, day: int) -> Any:
        """Run *entry* against the real input for *day*."""
        self.state = RunState.RUNNING_REAL
        data = self.provider.resolve(day)
        return entry(PuzzleInput(day=day, data=data))

    def run(self, identifier: str | None = None) -> RunOutcome:
        """Dispatch, check the sample, then solve the real input.

        Raises
        ------
        UnknownPuzzleError
            *identifier* is not registered.
        MissingDayError
            The resolved name carries no day number.
        SampleMismatchError
            The sample answer was wrong; the real input is not run.
        """
        self.state = RunState.IDLE
        entry, day = self.dispatch(identifier)
        sample = self.check_sample(entry, day)
        if not sample.ok:
            raise SampleMismatchError(entry.name, sample.got, sample.want)
        result = self.run_real(entry, day)
        self.state = RunState.DONE
        logger.info("%s answered %s", entry.name, stringify(result))
        return RunOutcome(name=entry.name, day=day, sample=sample, result=result)
