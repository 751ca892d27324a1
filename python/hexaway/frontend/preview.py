"""Rich text preview of a generated level.

Draws the hex grid one template row per line, highest ``y`` first, each row
shifted one column right of the row below so neighbouring rows interlock.
Every piece is shown as its direction arrow in its palette colour.
"""

from __future__ import annotations

import rich.box
from rich.console import Group
from rich.errors import StyleSyntaxError
from rich.panel import Panel
from rich.style import Style
from rich.table import Table
from rich.text import Text

from hexaway.models.grid import Cell
from hexaway.models.level import Level


# -- board rendering ----------------------------------------------------------


def _piece_style(color: str) -> Style:
    # Palette entries are opaque; anything rich cannot parse renders plain.
    try:
        return Style.parse(f"bold {color}")
    except StyleSyntaxError:
        return Style(bold=True)


def render_board(level: Level) -> Text:
    """Return the grid as styled text: arrows, ``·`` for empty cells."""
    pieces = {p.position: p for p in level.pieces}
    palette = level.color_palette
    text = Text()
    # Row 0 is the bottom row; each row up sits half a cell further right.
    for y, row in reversed(list(enumerate(level.grid_shape.rows))):
        text.append(" " * y)
        for x, valid in enumerate(row):
            if not valid:
                text.append("  ")
                continue
            piece = pieces.get(Cell(x, y))
            if piece is None:
                text.append("· ", style="dim")
            else:
                color = palette[piece.color_index % len(palette)]
                text.append(f"{piece.direction.symbol} ", style=_piece_style(color))
        text.append("\n")
    text.rstrip()
    return text


def _render_stats(level: Level) -> Table:
    table = Table(show_header=False, box=rich.box.SIMPLE, padding=(0, 1))
    table.add_column(style="dim")
    table.add_column(style="bold yellow", justify="right")
    table.add_row("Pieces", str(level.piece_count))
    table.add_row("Solution", f"{len(level.solution)} moves")
    table.add_row("Move limit", str(level.move_limit))
    table.add_row("Remove", str(level.removal_target))
    table.add_row("Difficulty", str(level.difficulty))
    table.add_row("Builder", level.strategy)
    if level.seed is not None:
        table.add_row("Seed", str(level.seed))
    return table


def render_solution(level: Level) -> Text:
    text = Text()
    for i, move in enumerate(level.solution, 1):
        text.append(f"{i:>3}. ", style="dim")
        text.append(f"({move.position.x},{move.position.y}) ")
        text.append(f"{move.direction.symbol} {move.direction.value}\n", style="cyan")
    text.rstrip()
    return text


def render_level(level: Level, show_solution: bool = False) -> Panel:
    parts = [render_board(level), Text(""), _render_stats(level)]
    if show_solution:
        parts.append(render_solution(level))
    return Panel(
        Group(*parts),
        title=f"[bold cyan]{level.name}[/bold cyan]",
        border_style="bright_blue",
        padding=(1, 2),
    )
