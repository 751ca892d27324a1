"""The slide rule -- the single source of truth for how a piece moves."""

from __future__ import annotations

from dataclasses import dataclass

from hexaway.models.board import Board
from hexaway.models.grid import Cell, Direction


@dataclass(frozen=True)
class SlideResult:
    """Where a slide ends.

    ``end_cell`` is the last free cell reached (possibly the start cell).
    When ``exited_grid`` is True the piece leaves the board from there.
    """

    end_cell: Cell
    exited_grid: bool

    def moved_from(self, start: Cell) -> bool:
        """True unless the slide was blocked before its first step."""
        return self.exited_grid or self.end_cell != start


def resolve_slide(board: Board, start: Cell, direction: Direction) -> SlideResult:
    """Step from *start* along *direction* until blocked or off the grid.

    Never mutates *board*.
    """
    grid = board.grid
    current = start
    while True:
        nxt = grid.neighbor(current, direction)
        if not grid.is_valid(nxt):
            return SlideResult(current, exited_grid=True)
        if nxt in board:
            return SlideResult(current, exited_grid=False)
        current = nxt


def slide_path(board: Board, start: Cell, direction: Direction) -> list[Cell]:
    """Return every cell a slide occupies, *start* included, in order."""
    grid = board.grid
    path = [start]
    current = start
    while True:
        nxt = grid.neighbor(current, direction)
        if not grid.is_valid(nxt) or nxt in board:
            return path
        path.append(nxt)
        current = nxt


def blocker_of(board: Board, start: Cell, direction: Direction) -> Cell | None:
    """Return the occupied cell that stops a slide, or None if it exits."""
    result = resolve_slide(board, start, direction)
    if result.exited_grid:
        return None
    return board.grid.neighbor(result.end_cell, direction)
