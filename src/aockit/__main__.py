"""Entry point for ``python -m aockit``."""

from __future__ import annotations


def main() -> int:
    """Bootstrap and run the aockit CLI."""
    from aockit.cli import invoke

    return invoke()


if __name__ == "__main__":
    raise SystemExit(main())
