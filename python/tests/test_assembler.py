"""Level assembler arithmetic and packaging."""

from __future__ import annotations

import pytest

from hexaway.engine.gamegenerator import LevelAssembler
from hexaway.engine.gamestate import BuildResult
from hexaway.models.board import Board, Move, Piece
from hexaway.models.grid import Cell, Direction, Grid, GridShape
from hexaway.models.level import DEFAULT_PALETTE, DifficultyParams

E, W, NE = Direction.EAST, Direction.WEST, Direction.NORTH_EAST


@pytest.mark.parametrize(
    ("length", "multiplier", "expected"),
    [(0, 1.5, 0), (1, 1.5, 2), (4, 1.5, 6), (7, 1.5, 11), (3, 1.0, 3)],
)
def test_move_limit_rounds_up(length: int, multiplier: float, expected: int) -> None:
    assert LevelAssembler.move_limit(length, multiplier) == expected


@pytest.mark.parametrize(
    ("pieces", "fraction", "expected"),
    [(1, 0.6, 1), (5, 0.5, 3), (8, 0.6, 5), (10, 1.0, 10)],
)
def test_removal_target_rounds_up(pieces: int, fraction: float, expected: int) -> None:
    assert LevelAssembler.removal_target(pieces, fraction) == expected


def test_difficulty_counts_moves_turns_and_pieces() -> None:
    a, b = Cell(0, 0), Cell(1, 1)
    solution = [Move(a, E), Move(b, E), Move(a, W), Move(b, NE)]
    # 4 moves, 2 changes of direction, 3 pieces.
    assert LevelAssembler.difficulty(solution, 3) == 40 + 10 + 9
    assert LevelAssembler.difficulty([], 2) == 6


def test_assemble_packages_build() -> None:
    shape = GridShape.rectangle(4, 3)
    board = Board(Grid.from_shape(shape))
    for cell, direction in [(Cell(3, 2), W), (Cell(1, 0), E), (Cell(0, 2), E), (Cell(2, 0), W)]:
        board.place(Piece(cell, direction, 1))
    result = BuildResult(board, (Move(Cell(1, 0), E), Move(Cell(3, 2), W)), "backward")

    level = LevelAssembler.assemble(
        result, shape, DEFAULT_PALETTE, DifficultyParams(), level_number=3, seed=9
    )

    assert [tuple(p.position) for p in level.pieces] == [(1, 0), (2, 0), (0, 2), (3, 2)]
    assert level.name == "Level 3"
    assert level.seed == 9
    assert level.move_limit == 3
    assert level.removal_target == 3
    assert level.color_palette == DEFAULT_PALETTE
    assert level.strategy == "backward"
    assert level.difficulty == 20 + 5 + 12
