"""Shared plumbing for the level builders."""

from __future__ import annotations

import logging
import random
from typing import Iterable, Sequence

from hexaway.engine.gamegenerator.assembler import LevelAssembler
from hexaway.engine.gamesolver.deadlock import DeadlockDetector
from hexaway.engine.gamesolver.solver import Solver
from hexaway.engine.gamesolver.validator import SolutionValidator
from hexaway.engine.gamestate.state import BuildPhase, BuildResult, BuildState
from hexaway.errors import ValidationMismatchError
from hexaway.models.board import Board, Piece
from hexaway.models.grid import DIRECTIONS, Cell, Direction, Grid
from hexaway.models.level import DifficultyParams

logger = logging.getLogger(__name__)


def static_piece_count(params: DifficultyParams) -> int:
    """How many never-moving pieces both builders seed first."""
    return max(1, params.piece_count // 4)


def clears_with(final: Board, piece: Piece) -> bool:
    """True if *final* plus *piece* can still be emptied by exit moves."""
    trial = final.copy()
    trial.place(piece)
    return Solver.clears(trial)


class Builder:
    """Base class -- one instance builds one attempt from one RNG stream.

    Every builder keeps ``state.final``, the board its construction moves
    should leave behind, emptiable by exit moves alone.  :meth:`_finish`
    appends those exits, so a finished solution clears the whole board.
    """

    strategy = "base"

    def __init__(
        self,
        grid: Grid,
        params: DifficultyParams,
        palette_size: int,
        rng: random.Random,
    ) -> None:
        self.grid = grid
        self.params = params
        self.palette_size = palette_size
        self.rng = rng

    def build(self) -> BuildResult | None:
        raise NotImplementedError

    # -- placement ------------------------------------------------------------

    def _random_color(self) -> int:
        return self.rng.randrange(self.palette_size)

    def _safe_piece(
        self,
        board: Board,
        cell: Cell,
        final: Board | None = None,
        directions: Sequence[Direction] | None = None,
    ) -> Piece | None:
        """A piece at *cell* that keeps *board* deadlock-free and, when given,
        *final* clearable.

        *directions* are tried in order; by default all six in random order.
        Returns None if no direction works.
        """
        if directions is None:
            directions = list(DIRECTIONS)
            self.rng.shuffle(directions)
        color = self._random_color()
        for direction in directions:
            piece = Piece(cell, direction, color)
            if self._trial(board, piece) is None:
                continue
            if final is not None and not clears_with(final, piece):
                continue
            return piece
        return None

    def _trial(self, board: Board, piece: Piece, old: Cell | None = None) -> Board | None:
        """Return a copy of *board* with *piece* placed (or moved from *old*),
        or None if the result deadlocks."""
        trial = board.copy()
        if old is None:
            trial.place(piece)
        else:
            trial.relocate(old, piece)
        if DeadlockDetector.has_deadlock(trial):
            return None
        return trial

    def _seed(self, state: BuildState, cells: Iterable[Cell] | None = None) -> None:
        """Place the static pieces that never move during construction."""
        available = list(cells) if cells is not None else state.board.free_cells()
        target = static_piece_count(self.params)
        while available and len(state.static_cells) < target:
            cell = available.pop(self.rng.randrange(len(available)))
            piece = self._safe_piece(state.board, cell, state.final)
            if piece is None:
                continue
            state.board.place(piece)
            state.final.place(piece)
            state.static_cells.add(cell)
            state.used.add(cell)
        state.advance(BuildPhase.EXTENDING, f"{len(state.static_cells)} static pieces")

    # -- validation -----------------------------------------------------------

    def _finish(self, state: BuildState) -> BuildResult | None:
        """Replay the construction moves, check the board they leave, then
        append the exit moves that clear it."""
        state.advance(BuildPhase.VALIDATING)
        if not state.moves:
            state.fail("no moves recorded")
            return None

        deadlock = DeadlockDetector.find(state.board)
        if deadlock is not None:
            a, b = deadlock
            logger.warning(
                "%s builder left %s and %s facing each other",
                self.strategy, tuple(a.position), tuple(b.position),
            )
            state.fail(f"deadlock between {tuple(a.position)} and {tuple(b.position)}")
            return None

        try:
            game = SolutionValidator.replay(state.board, state.moves)
        except ValidationMismatchError as e:
            logger.warning("%s builder recorded an unplayable solution: %s", self.strategy, e)
            state.fail("validation mismatch")
            return None

        if game.board.pieces != state.final.pieces:
            logger.warning(
                "%s builder solution ends on %d pieces, expected %d in place",
                self.strategy, len(game.board), len(state.final),
            )
            state.fail("end state mismatch")
            return None

        for move in Solver.exit_order(game.board):
            game.apply(move)
            state.record(move)

        target = LevelAssembler.removal_target(len(state.board), self.params.removal_fraction)
        if not game.is_won(target):
            state.fail(f"{game.removed} of {target} pieces removed")
            return None

        state.advance(BuildPhase.DONE, f"{len(state.moves)} moves")
        return state.result()
