"""aockit CLI: Typer-based entry point.

Commands
--------
run         Check a puzzle against its sample, then solve the real input.
list        List registered puzzles and whether they carry a sample.
fetch       Download a day's input into the cache without running anything.

Puzzle scripts call :func:`main` directly; flags without a command are
treated as ``run`` flags, so ``python day07.py --day 7`` works.  :func:`main`
ends the process with the exit status; :func:`invoke` returns it instead.
"""

from __future__ import annotations

import importlib
import importlib.util
import logging
import sys
from pathlib import Path
from types import ModuleType
from typing import Optional

import click
import typer

from aockit.config.settings import get_settings
from aockit.errors import AocError, SampleMismatchError
from aockit.inputs.provider import InputProvider
from aockit.puzzles.registry import PuzzleRegistry, get_registry
from aockit.puzzles.runner import PuzzleRunner

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="aockit",
    help="Run daily puzzles against their samples, then against real input.",
    add_completion=False,
    no_args_is_help=True,
)

_COMMANDS = ("run", "list", "fetch")


def _setup_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s  %(name)-24s  %(levelname)-7s  %(message)s",
    )


def _fatal(message: str) -> typer.Exit:
    typer.echo(message, err=True)
    return typer.Exit(1)


def _import_puzzles(target: str) -> ModuleType:
    """Import a puzzle module given as a dotted name or a ``.py`` path."""
    path = Path(target)
    if path.suffix == ".py":
        if not path.is_file():
            raise _fatal(f"cannot import puzzle module {target!r}: no such file")
        spec = importlib.util.spec_from_file_location(path.stem, path)
        if spec is None or spec.loader is None:
            raise _fatal(f"cannot load puzzle module from {path}")
        module = importlib.util.module_from_spec(spec)
        sys.modules[spec.name] = module
        spec.loader.exec_module(module)
        return module
    return importlib.import_module(target)


def _registry_for(ctx: typer.Context, module: Optional[str]) -> PuzzleRegistry:
    """Pick the registry to dispatch from, importing *module* first if given.

    A module-level ``registry`` attribute in the imported module wins over
    the default registry its ``@puzzle`` decorators populate.
    """
    registry: PuzzleRegistry = ctx.obj if isinstance(ctx.obj, PuzzleRegistry) else get_registry()
    if not module:
        return registry
    try:
        mod = _import_puzzles(module)
    except ImportError as exc:
        raise _fatal(f"cannot import puzzle module {module!r}: {exc}")
    own = getattr(mod, "registry", None)
    if isinstance(own, PuzzleRegistry):
        registry = own
    try:
        registry.load_samples(mod)
    except OSError as exc:
        logger.debug("No docstring samples from %s: %s", module, exc)
    return registry


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


@app.command()
def run(
    ctx: typer.Context,
    day: str = typer.Option(
        "", "--day", "-d",
        help='Puzzle func name; empty means latest registered. A leading digit implies the "day" prefix.',
    ),
    module: Optional[str] = typer.Option(
        None, "--module", "-m", help="Module or .py file that registers the puzzles.",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    """Check a puzzle against its sample, then print its real answer."""
    _setup_logging(verbose)
    registry = _registry_for(ctx, module)
    runner = PuzzleRunner(registry, InputProvider(get_settings()))

    try:
        outcome = runner.run(day)
    except SampleMismatchError:
        raise typer.Exit(1)
    except AocError as exc:
        raise _fatal(str(exc))

    typer.echo(outcome.answer)


@app.command("list")
def list_puzzles(
    ctx: typer.Context,
    module: Optional[str] = typer.Option(
        None, "--module", "-m", help="Module or .py file that registers the puzzles.",
    ),
) -> None:
    """List registered puzzles, oldest first."""
    _setup_logging()
    registry = _registry_for(ctx, module)
    names = registry.names()
    if not names:
        typer.echo("No puzzles registered.")
        return
    for name in names:
        sample = registry.sample_for(name)
        marker = f"want={sample.want}" if sample else "no sample"
        typer.echo(f"  {name:20s}  {marker}")


@app.command()
def fetch(
    day: int = typer.Argument(..., min=1, max=25, help="Day number to download."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    """Make sure a day's input is in the local cache."""
    _setup_logging(verbose)
    settings = get_settings()
    try:
        data = InputProvider(settings).resolve(day)
    except AocError as exc:
        raise _fatal(str(exc))
    typer.echo(f"{settings.cache_path(day)}: {len(data)} bytes")


def _defining_modules(registry: PuzzleRegistry) -> list[ModuleType]:
    found: dict[str, ModuleType] = {}
    for entry in registry.puzzles():
        name = getattr(entry.func, "__module__", None)
        mod = sys.modules.get(name) if name else None
        if mod is not None and getattr(mod, "__file__", None):
            found[name] = mod
    return list(found.values())


def invoke(
    registry: PuzzleRegistry | None = None,
    argv: list[str] | None = None,
    module: ModuleType | None = None,
) -> int:
    """Run the CLI and return its exit status.

    Backs the ``aockit`` console script and :func:`main`.

    Parameters
    ----------
    registry:
        Registry to dispatch from; defaults to the module-level one.
    argv:
        Arguments without the program name; defaults to ``sys.argv[1:]``.
    module:
        Module whose docstrings hold samples; defaults to the modules that
        define the registered puzzles.
    """
    args = list(sys.argv[1:] if argv is None else argv)
    if registry is None:
        registry = get_registry()

    if len(registry):
        # Called from a puzzle script: the puzzles are already registered.
        sources = [module] if module is not None else _defining_modules(registry)
        for source in sources:
            try:
                registry.load_samples(source)
            except (OSError, TypeError) as exc:
                logger.debug("No docstring samples from %s: %s", source, exc)
        if not args or args[0] not in _COMMANDS + ("--help",):
            args = ["run", *args]

    try:
        rv = app(args=args, obj=registry, standalone_mode=False)
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        return 1
    return rv if isinstance(rv, int) else 0


def main(
    registry: PuzzleRegistry | None = None,
    argv: list[str] | None = None,
    module: ModuleType | None = None,
) -> None:
    """Entry point for puzzle scripts; exits with the status of :func:`invoke`.

    A sample mismatch, an unknown puzzle or any other fatal condition ends
    the process with status 1.
    """
    raise SystemExit(invoke(registry, argv, module))
