"""Environment-driven settings.

All values are loaded from environment variables (prefix ``AOC_``) or a
``.env`` file in the working directory.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AocSettings(BaseSettings):
    """Where puzzle input comes from and where it is cached."""

    model_config = SettingsConfigDict(
        env_prefix="AOC_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    year: int = Field(default=2023, ge=2015)
    base_url: str = "https://adventofcode.com"
    session_file: Path = Path.home() / "keys" / "aoc.session"
    """File holding the session cookie value (surrounding whitespace is ignored)."""

    cache_dir: Path = Path(".")
    cache_template: str = "{day}.input"
    """Cache filename, formatted with ``day``."""

    http_timeout: float | None = Field(default=None, gt=0)
    """Seconds before a fetch gives up; ``None`` waits forever."""
    user_agent: str = "aockit/0.1 (personal puzzle helper)"

    day_prefix: str = "day"
    """Prepended to identifiers that start with a digit (``7`` -> ``day7``)."""

    def cache_path(self, day: int) -> Path:
        """Return the cache file used for *day*."""
        return self.cache_dir / self.cache_template.format(day=day)

    def input_url(self, day: int) -> str:
        return f"{self.base_url.rstrip('/')}/{self.year}/day/{day}/input"


# Module-level singleton; import and use directly.
settings = AocSettings()


def get_settings() -> AocSettings:
    """Return the module-level AocSettings singleton."""
    return settings
