"""Sliding Tile Puzzle.

Usage::

    slidepuzzle                     # 5×5 board
    slidepuzzle -s 3 --seed 42      # reproducible 3×3 board
    slidepuzzle --log-level debug   # engine events on stderr
"""

import logging
import random
from enum import StrEnum
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from slidepuzzle.backend.config import DEFAULT_SIZE, SUPPORTED_SIZES, EngineConfig
from slidepuzzle.backend.errors import ConfigurationError


class LogLevel(StrEnum):
    debug = "debug"
    info = "info"
    warning = "warning"
    error = "error"


# -- helpers ------------------------------------------------------------------


def _setup_logging(level: LogLevel) -> None:
    logging.basicConfig(
        level=level.value.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=True)],
        force=True,
    )


def _build_config(steps: Optional[int]) -> EngineConfig:
    if steps is None:
        return EngineConfig()
    try:
        return EngineConfig(min_walk_steps=steps, steps_per_cell=0)
    except ConfigurationError as exc:
        raise typer.BadParameter(str(exc), param_hint="--steps") from exc


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    size: int = typer.Option(
        DEFAULT_SIZE, "-s", "--size",
        min=min(SUPPORTED_SIZES), max=max(SUPPORTED_SIZES),
        help="Grid size (3-5).",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        help="Seed the shuffle for a reproducible board.",
    ),
    steps: Optional[int] = typer.Option(
        None, "--steps",
        help="Random moves per shuffle walk (default scales with the grid).",
    ),
    show_goal: bool = typer.Option(
        True, "--show-goal/--hide-goal",
        help="Show the goal arrangement next to the board.",
    ),
    log_level: LogLevel = typer.Option(
        LogLevel.warning, "--log-level",
        help="Logging verbosity.",
    ),
) -> None:
    """Sliding Tile Puzzle."""
    _setup_logging(log_level)
    config = _build_config(steps)
    rng = random.Random(seed)

    from slidepuzzle.frontend.cli.rich.app import run

    run(size, rng=rng, config=config, show_goal=show_goal)


if __name__ == "__main__":
    app()
