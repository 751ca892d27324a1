"""Replays a recorded solution to prove it is playable."""

from __future__ import annotations

import logging
from typing import Sequence

from hexaway.engine.gameplay.game import Replay
from hexaway.errors import ValidationMismatchError
from hexaway.models.board import Board, Move

logger = logging.getLogger(__name__)


class SolutionValidator:
    """Stateless validator -- all methods are static."""

    @staticmethod
    def replay(board: Board, moves: Sequence[Move]) -> Replay:
        """Apply *moves* to a copy of *board* and return the finished game.

        Raises ``ValidationMismatchError`` at the first move whose piece is
        missing, faces another way, or cannot move.
        """
        game = Replay(board)
        for index, move in enumerate(moves):
            outcome = game.apply(move)
            if not outcome.is_legal:
                raise ValidationMismatchError(
                    "Recorded move cannot be played",
                    index=index,
                    position=tuple(move.position),
                    direction=move.direction.value,
                    outcome=outcome.value,
                )
        return game

    @staticmethod
    def validate(board: Board, moves: Sequence[Move], removal_target: int = 0) -> bool:
        """Return True if every move in *moves* is legal in order and at
        least *removal_target* pieces leave the grid."""
        try:
            game = SolutionValidator.replay(board, moves)
        except ValidationMismatchError as e:
            logger.debug("Solution rejected: %s", e)
            return False
        if not game.is_won(removal_target):
            logger.debug(
                "Solution removes %d pieces, %d required", game.removed, removal_target
            )
            return False
        return True
