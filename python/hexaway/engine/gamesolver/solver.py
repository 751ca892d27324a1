"""Greedy clearing: trigger pieces that can leave the grid until none can."""

from __future__ import annotations

from hexaway.engine.gameplay.slide import resolve_slide
from hexaway.models.board import Board, Move


class Solver:
    """Stateless solver -- all methods are static.

    Removing a piece only ever frees cells, so a piece that can exit now can
    still exit after any other piece has left.  Exiting greedily therefore
    removes every piece that exit moves alone can remove.
    """

    @staticmethod
    def exit_order(board: Board) -> list[Move]:
        """Return exit moves, in playable order, for every piece that can leave."""
        remaining = board.copy()
        order: list[Move] = []
        progress = True
        while progress:
            progress = False
            for piece in remaining:
                if resolve_slide(remaining, piece.position, piece.direction).exited_grid:
                    remaining.remove(piece.position)
                    order.append(Move(piece.position, piece.direction))
                    progress = True
        return order

    @staticmethod
    def clears(board: Board) -> bool:
        """Return True if exit moves alone can empty *board*."""
        return len(Solver.exit_order(board)) == len(board)
