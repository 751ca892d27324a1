"""Fallback builder: pieces on straight, non-crossing paths."""

from __future__ import annotations

from hexaway.engine.gamegenerator.base import Builder, clears_with
from hexaway.engine.gameplay.slide import resolve_slide, slide_path
from hexaway.engine.gamestate.state import BuildResult, BuildState
from hexaway.models.board import Board, Move, Piece
from hexaway.models.grid import DIRECTIONS, Cell, Direction


class SimpleBuilder(Builder):
    """Trades interaction between pieces for a solvable-by-construction board.

    Each placed piece reserves the cells its slide covers, and later pieces
    may neither start on nor slide through a reserved cell.  A slide must
    leave the grid or stop against a static piece: earlier pieces are gone
    by the time a later one moves.  Playing the pieces in placement order is
    then always legal.
    """

    strategy = "simple"

    def build(self) -> BuildResult | None:
        state = BuildState(Board(self.grid), self.strategy)
        self._seed(state)

        board = state.board
        reserved: set[Cell] = set()
        budget = min(
            self.params.target_move_count,
            max(0, self.params.piece_count - len(board)),
            len(board.free_cells()) // 3,
        )

        for _ in range(budget):
            available = [c for c in board.free_cells() if c not in reserved]
            if not available:
                break
            position = self.rng.choice(available)
            safe = self._safe_directions(state, reserved, position)
            if not safe:
                continue
            piece = Piece(position, self.rng.choice(safe), self._random_color())
            board.place(piece)
            result = resolve_slide(board, position, piece.direction)
            if not result.exited_grid:
                state.final.place(piece.moved_to(result.end_cell))
            reserved.update(slide_path(board, position, piece.direction))
            state.record(Move(position, piece.direction))

        return self._finish(state)

    def _safe_directions(
        self, state: BuildState, reserved: set[Cell], position: Cell
    ) -> list[Direction]:
        safe: list[Direction] = []
        for direction in DIRECTIONS:
            trial = self._trial(state.board, Piece(position, direction, 0))
            if trial is None:
                continue
            result = resolve_slide(trial, position, direction)
            if not result.moved_from(position):
                continue
            if any(c in reserved for c in slide_path(trial, position, direction)):
                continue
            if not result.exited_grid:
                if result.end_cell.step(direction) not in state.static_cells:
                    continue
                if not clears_with(state.final, Piece(result.end_cell, direction, 0)):
                    continue
            safe.append(direction)
        return safe
