"""Exceptions raised by aockit.

Every failure the command line treats as fatal derives from
:class:`AocError`.  Each class also inherits the closest built-in
exception so callers can catch them generically.
"""

from __future__ import annotations


class AocError(Exception):
    """Base class for all aockit failures."""


class UnknownPuzzleError(AocError, LookupError):
    """The requested puzzle identifier is not registered."""

    def __init__(self, identifier: str, available: list[str] | None = None) -> None:
        self.identifier = identifier
        self.available = list(available or [])
        if identifier:
            msg = f"puzzle func {identifier!r} not registered"
        else:
            msg = "no puzzles registered"
        if self.available:
            msg += f"; available: {', '.join(self.available)}"
        super().__init__(msg)


class MissingDayError(AocError, ValueError):
    """A puzzle name carries no digits to derive its day number from."""

    def __init__(self, identifier: str) -> None:
        self.identifier = identifier
        super().__init__(
            f"no digits in func name {identifier!r} from which to extract day number"
        )


class SessionNotFoundError(AocError, FileNotFoundError):
    """The session credential file is missing, unreadable or empty."""


class InputFetchError(AocError, RuntimeError):
    """Downloading input failed: a non-success status or a transport error.

    *status_code* is ``None`` when no response was received.
    """

    def __init__(self, url: str, status_code: int | None = None, reason: str = "") -> None:
        self.url = url
        self.status_code = status_code
        if status_code is None:
            msg = f"error fetching {url}: {reason}"
        else:
            msg = f"bad status fetching {url}: {status_code} {reason}"
        super().__init__(msg.rstrip())


class InputCacheError(AocError, OSError):
    """The local input cache file could not be read or written."""


class InputDecodeError(AocError, ValueError):
    """Puzzle input could not be decoded as UTF-8 text."""


class SampleMismatchError(AocError, AssertionError):
    """A puzzle produced the wrong answer for its sample input."""

    def __init__(self, name: str, got: str, want: str) -> None:
        self.name = name
        self.got = got
        self.want = want
        super().__init__(f"for {name} sample, got={got}; want {want}")
