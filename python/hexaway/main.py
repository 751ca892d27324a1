"""Hex sliding puzzle level generator.

Usage::

    hexaway                                  # one level, hexagon radius 3
    hexaway --shape rectangle --size 5 -n 10 --out levels.json
    hexaway --template board.txt --seed 42 --solution
    hexaway --config hard.json --verbose
"""

from __future__ import annotations

import json
import logging
from enum import StrEnum
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from hexaway.engine.gamegenerator import LevelGenerator
from hexaway.errors import HexawayError
from hexaway.frontend.preview import render_level
from hexaway.models.grid import GridShape
from hexaway.models.level import DifficultyParams

console = Console()


# -- shape registry -----------------------------------------------------------


class Shape(StrEnum):
    hexagon = "hexagon"
    rectangle = "rectangle"


def _build_shape(shape: Shape, size: int, template: Optional[Path]) -> GridShape:
    if template is not None:
        return GridShape.from_text(template.read_text())
    if shape is Shape.rectangle:
        return GridShape.rectangle(size, size)
    return GridShape.hexagon(size)


# -- helpers ------------------------------------------------------------------


def _load_params(config: Optional[Path], overrides: dict) -> DifficultyParams:
    data: dict = {}
    if config is not None:
        data.update(json.loads(config.read_text()))
    data.update({k: v for k, v in overrides.items() if v is not None})
    return DifficultyParams.from_dict(data)


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    shape: Shape = typer.Option(
        Shape.hexagon, "--shape",
        help="Built-in grid shape.",
    ),
    size: int = typer.Option(
        3, "-s", "--size",
        min=1, max=12,
        help="Hexagon radius or rectangle side.",
    ),
    template: Optional[Path] = typer.Option(
        None, "-t", "--template",
        exists=True, dir_okay=False,
        help="Text grid template ('#' valid, '.' invalid). Overrides --shape.",
    ),
    config: Optional[Path] = typer.Option(
        None, "-c", "--config",
        exists=True, dir_okay=False,
        help="JSON file with difficulty parameters.",
    ),
    moves: Optional[int] = typer.Option(None, "--moves", help="Target move count."),
    pieces: Optional[int] = typer.Option(None, "--pieces", help="Piece count."),
    direction_change_rate: Optional[float] = typer.Option(
        None, "--direction-change-rate", help="Odds of a forced turn per step.",
    ),
    removal_fraction: Optional[float] = typer.Option(
        None, "--removal-fraction", help="Share of pieces the player must remove.",
    ),
    move_limit_multiplier: Optional[float] = typer.Option(
        None, "--move-limit-multiplier", help="Move limit as a multiple of the solution.",
    ),
    seed: Optional[int] = typer.Option(None, "--seed", help="Seed of the first level."),
    count: int = typer.Option(1, "-n", "--count", min=1, help="Levels to generate."),
    start: int = typer.Option(1, "--start", min=1, help="Number of the first level."),
    out: Optional[Path] = typer.Option(
        None, "-o", "--out",
        dir_okay=False,
        help="Write the levels as JSON to this file.",
    ),
    show: bool = typer.Option(True, "--show/--no-show", help="Print a preview."),
    solution: bool = typer.Option(False, "--solution", help="Include the solution."),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Debug logging."),
) -> None:
    """Generate hex sliding puzzle levels."""
    _setup_logging(verbose)

    try:
        params = _load_params(
            config,
            {
                "target_move_count": moves,
                "piece_count": pieces,
                "direction_change_rate": direction_change_rate,
                "removal_fraction": removal_fraction,
                "move_limit_multiplier": move_limit_multiplier,
            },
        )
        generator = LevelGenerator(_build_shape(shape, size, template), params)
        levels = generator.generate_batch(count, start=start, seed=seed)
    except (HexawayError, ValueError) as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        raise typer.Exit(code=1)

    if show:
        for level in levels:
            console.print(render_level(level, show_solution=solution))

    if out is not None:
        out.parent.mkdir(parents=True, exist_ok=True)
        out.write_text(json.dumps([lv.to_dict() for lv in levels], indent=2) + "\n")
        console.print(f"[green]Wrote {len(levels)} level(s) to {out}[/green]")


if __name__ == "__main__":
    app()
