"""Backward construction: undo moves from a final board, record the forward ones."""

from __future__ import annotations

import logging

from hexaway.engine.gamegenerator.base import Builder
from hexaway.engine.gamestate.state import BuildResult, BuildState
from hexaway.models.board import Board, Move, Piece
from hexaway.models.grid import DIRECTIONS, Cell, Direction

logger = logging.getLogger(__name__)

# Extension stops after this many iterations per requested move.
ITERATION_FACTOR = 4


class BackwardBuilder(Builder):
    """Builds a start board by pulling pieces back against their facing.

    A piece at ``old`` facing ``d`` whose next cell along ``d`` is taken can
    be pulled back over free cells to ``new``; the forward move
    ``Move(new, d)`` then slides it straight onto ``old`` again.  Pieces
    never turn, so every recorded move is played the way its piece faces.

    Fresh pieces only go on cells no piece has stood on or slid across.  A
    piece added earlier in backward time therefore never gets in the way of
    a move recorded before it, and replaying the reversed moves ends on the
    seeded final board.
    """

    strategy = "backward"

    def build(self) -> BuildResult | None:
        state = BuildState(Board(self.grid), self.strategy)
        self._seed(state)
        self._extend(state)
        # Recorded newest-first; forward play runs the other way.
        state.moves.reverse()
        return self._finish(state)

    # -- extension ------------------------------------------------------------

    def _extend(self, state: BuildState) -> None:
        params = self.params
        remaining = params.piece_count - len(state.board)
        made = 0
        ceiling = ITERATION_FACTOR * params.target_move_count + params.piece_count

        for _ in range(ceiling):
            if made >= params.target_move_count:
                break

            moves_left = params.target_move_count - made
            if remaining > 0 and self.rng.random() < remaining / (remaining + moves_left):
                if self._place_fresh(state):
                    remaining -= 1
                    continue

            step = self._pick_step(state)
            if step is None:
                if remaining > 0 and self._place_fresh(state):
                    remaining -= 1
                    continue
                logger.debug("No backward slide left after %d moves", made)
                break

            piece, path = step
            self._relocate(state, piece, path)
            made += 1

    @staticmethod
    def _pulls(board: Board, piece: Piece) -> list[list[Cell]]:
        """Every backward slide of *piece*, as the cells it crosses, nearest first.

        The last cell of each path is where the piece ends up.
        """
        if piece.position.step(piece.direction) not in board:
            return []
        back = piece.direction.opposite
        paths: list[list[Cell]] = []
        path: list[Cell] = []
        cell = piece.position.step(back)
        while board.is_free(cell):
            path.append(cell)
            paths.append(list(path))
            cell = cell.step(back)
        return paths

    def _pick_step(self, state: BuildState) -> tuple[Piece, list[Cell]] | None:
        """A random deadlock-free backward slide of a non-static piece."""
        board = state.board
        pieces = [
            piece
            for piece in board
            if piece.position not in state.static_cells and self._pulls(board, piece)
        ]
        self.rng.shuffle(pieces)
        self._prefer_turns(state, pieces)
        for piece in pieces:
            options = self._pulls(board, piece)
            self.rng.shuffle(options)
            for path in options:
                if self._trial(board, piece.moved_to(path[-1]), piece.position) is not None:
                    return piece, path
        return None

    def _prefer_turns(self, state: BuildState, pieces: list[Piece]) -> None:
        """With ``direction_change_rate`` odds, try pieces facing away from the
        last recorded move first, so the solution changes direction there."""
        if not state.moves or self.rng.random() >= self.params.direction_change_rate:
            return
        last = state.moves[-1].direction
        pieces.sort(key=lambda p: p.direction == last)

    def _relocate(self, state: BuildState, piece: Piece, path: list[Cell]) -> None:
        new = path[-1]
        state.board.relocate(piece.position, piece.moved_to(new))
        state.used.update(path)
        state.record(Move(new, piece.direction))

    # -- fresh pieces ---------------------------------------------------------

    def _place_fresh(self, state: BuildState) -> bool:
        """Add one more piece at a cell no piece has used yet.

        Cells and directions that can be pulled back straight away are
        preferred.  The piece also joins the final board, which must stay
        clearable.
        """
        board = state.board
        cells = [c for c in board.free_cells() if c not in state.used]
        if not cells:
            return False
        self.rng.shuffle(cells)
        cells.sort(key=lambda c: not any(self._pullable(board, c, d) for d in DIRECTIONS))
        for cell in cells:
            directions = list(DIRECTIONS)
            self.rng.shuffle(directions)
            directions.sort(key=lambda d: not self._pullable(board, cell, d))
            piece = self._safe_piece(board, cell, state.final, directions)
            if piece is not None:
                board.place(piece)
                state.final.place(piece)
                state.used.add(cell)
                return True
        return False

    @staticmethod
    def _pullable(board: Board, cell: Cell, direction: Direction) -> bool:
        # Facing a taken cell with room behind.
        return cell.step(direction) in board and board.is_free(cell.step(direction.opposite))
