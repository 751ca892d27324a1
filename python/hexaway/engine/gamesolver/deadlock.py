"""Detects pairs of pieces that face each other along a clear line."""

from __future__ import annotations

from hexaway.engine.gameplay.slide import blocker_of
from hexaway.models.board import Board, Piece


class DeadlockDetector:
    """Stateless -- all methods are static.

    A piece can only be stuck for good by the first piece on its line when
    that piece faces straight back; any other blocker can still leave.
    """

    @staticmethod
    def find(board: Board) -> tuple[Piece, Piece] | None:
        """Return the first mutually blocking ``(piece, blocker)`` pair."""
        for piece in board:
            cell = blocker_of(board, piece.position, piece.direction)
            if cell is None:
                continue
            other = board.get(cell)
            if other is not None and other.direction == piece.direction.opposite:
                return piece, other
        return None

    @staticmethod
    def has_deadlock(board: Board) -> bool:
        return DeadlockDetector.find(board) is not None
