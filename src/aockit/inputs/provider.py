"""Puzzle input resolution: override, local cache, then remote fetch.

Resolution order for a day:

1. An explicit override buffer (used while checking samples) is returned
   verbatim.
2. The cache file for the day, if present, is returned unmodified.
3. Otherwise the input is downloaded with the session cookie, written to
   the cache file and returned.  A cache file is trusted forever once
   written; nothing here expires or invalidates it.

Uses httpx for the HTTP request.
"""

from __future__ import annotations

import logging
from pathlib import Path

import httpx

from aockit.config.settings import AocSettings, get_settings
from aockit.errors import InputCacheError, InputFetchError, SessionNotFoundError

logger = logging.getLogger(__name__)


def read_session(path: Path) -> str:
    """Return the trimmed session token stored at *path*."""
    try:
        token = path.read_text(encoding="utf-8").strip()
    except FileNotFoundError as exc:
        raise SessionNotFoundError(f"session file not found: {path}") from exc
    except OSError as exc:
        raise SessionNotFoundError(f"cannot read session file {path}: {exc}") from exc
    if not token:
        raise SessionNotFoundError(f"session file is empty: {path}")
    return token


class InputProvider:
    """Resolve raw puzzle input bytes for a day.

    Parameters
    ----------
    settings:
        Source of the cache location, session file and remote URL.
        Defaults to the module-level settings.
    client:
        Optional ``httpx.Client`` used for downloads.  When omitted a
        short-lived client is created per fetch.
    """

    def __init__(
        self,
        settings: AocSettings | None = None,
        client: httpx.Client | None = None,
    ) -> None:
        self.settings = settings or get_settings()
        self._client = client

    def resolve(self, day: int, override: bytes | None = None) -> bytes:
        """Return input for *day*, or *override* when it is set."""
        if override is not None:
            logger.debug("Using override input (%d bytes) for day %d", len(override), day)
            return override

        cache = self.settings.cache_path(day)
        try:
            data = cache.read_bytes()
        except FileNotFoundError:
            logger.info("No cached input at %s; fetching day %d", cache, day)
        except OSError as exc:
            raise InputCacheError(f"cannot read input cache {cache}: {exc}") from exc
        else:
            logger.debug("Cache hit for day %d: %s", day, cache)
            return data

        data = self.fetch(day)
        try:
            cache.parent.mkdir(parents=True, exist_ok=True)
            cache.write_bytes(data)
        except OSError as exc:
            raise InputCacheError(f"cannot write input cache {cache}: {exc}") from exc
        logger.info("Cached %d bytes of day %d input at %s", len(data), day, cache)
        return data

    def fetch(self, day: int) -> bytes:
        """Download the input for *day*, bypassing the cache.

        Raises
        ------
        SessionNotFoundError
            The session credential file is missing or empty.
        InputFetchError
            The endpoint answered with a non-2xx status, or the request
            failed before a response arrived.
        """
        session = read_session(self.settings.session_file)
        url = self.settings.input_url(day)
        headers = {
            "User-Agent": self.settings.user_agent,
            "Cookie": f"session={session}",
        }

        logger.debug("GET %s", url)
        try:
            if self._client is not None:
                resp = self._client.get(url, headers=headers)
            else:
                with httpx.Client(timeout=self.settings.http_timeout) as client:
                    resp = client.get(url, headers=headers)
        except httpx.HTTPError as exc:
            logger.error("Fetching %s failed: %s", url, exc)
            raise InputFetchError(url, reason=str(exc)) from exc

        if not resp.is_success:
            logger.error("Fetching %s failed: %d %s", url, resp.status_code, resp.reason_phrase)
            raise InputFetchError(url, resp.status_code, resp.reason_phrase)
        return resp.content


def resolve_input(
    day: int,
    *,
    override: bytes | None = None,
    settings: AocSettings | None = None,
    client: httpx.Client | None = None,
) -> bytes:
    """Functional shortcut for :meth:`InputProvider.resolve`."""
    return InputProvider(settings, client).resolve(day, override)
