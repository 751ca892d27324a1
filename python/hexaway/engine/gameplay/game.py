"""Applies moves to a board -- the engine-side twin of the animation layer."""

from __future__ import annotations

from enum import StrEnum

from hexaway.engine.gameplay.slide import resolve_slide
from hexaway.models.board import Board, Move


class MoveOutcome(StrEnum):
    MOVED = "moved"
    EXITED = "exited"
    BLOCKED = "blocked"
    MISSING = "missing"
    WRONG_WAY = "wrong_way"

    @property
    def is_legal(self) -> bool:
        return self in (MoveOutcome.MOVED, MoveOutcome.EXITED)


class Replay:
    """Replays moves on a private copy of a board."""

    def __init__(self, board: Board) -> None:
        self.board = board.copy()
        self.moves: int = 0
        self.removed: int = 0

    # -- movement -------------------------------------------------------------

    def apply(self, move: Move) -> MoveOutcome:
        """Trigger the piece at ``move.position`` along ``move.direction``.

        A piece only ever slides the way it faces, so a move naming another
        direction is refused.  The board only changes when the returned
        outcome is legal.  A piece that exits the grid is removed rather than
        re-inserted.
        """
        board = self.board
        piece = board.get(move.position)
        if piece is None:
            return MoveOutcome.MISSING
        if piece.direction != move.direction:
            return MoveOutcome.WRONG_WAY

        result = resolve_slide(board, move.position, move.direction)
        if result.exited_grid:
            board.remove(move.position)
            self.removed += 1
            self.moves += 1
            return MoveOutcome.EXITED

        if result.end_cell == move.position:
            return MoveOutcome.BLOCKED

        board.relocate(move.position, piece.moved_to(result.end_cell))
        self.moves += 1
        return MoveOutcome.MOVED

    # -- queries --------------------------------------------------------------

    def is_won(self, removal_target: int) -> bool:
        return self.removed >= removal_target
