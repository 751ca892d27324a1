"""Greedy exit ordering."""

from __future__ import annotations

from hexaway.engine.gamesolver import SolutionValidator, Solver
from hexaway.models.board import Board, Move, Piece
from hexaway.models.grid import Cell, Direction, Grid, GridShape

E, W, NE = Direction.EAST, Direction.WEST, Direction.NORTH_EAST


# -- helpers ------------------------------------------------------------------


def _board(template: str, *pieces: tuple[int, int, Direction]) -> Board:
    board = Board(Grid.from_shape(GridShape.from_text(template)))
    for x, y, direction in pieces:
        board.place(Piece(Cell(x, y), direction, 0))
    return board


# -- tests --------------------------------------------------------------------


def test_queue_leaves_front_first() -> None:
    board = _board("####", (0, 0, E), (1, 0, E), (2, 0, E))
    order = Solver.exit_order(board)
    assert order == [Move(Cell(2, 0), E), Move(Cell(1, 0), E), Move(Cell(0, 0), E)]
    assert Solver.clears(board)
    assert SolutionValidator.validate(board, order, removal_target=3)


def test_blocked_piece_stays_behind() -> None:
    # (2,0) and (3,0) face each other; nothing behind them can leave.
    board = _board("####", (0, 0, E), (2, 0, E), (3, 0, W), (1, 0, E))
    assert Solver.exit_order(board) == []
    assert not Solver.clears(board)


def test_pieces_wait_for_their_blocker() -> None:
    board = _board("###\n###", (0, 0, W), (1, 0, NE), (1, 1, W), (2, 1, W))
    order = Solver.exit_order(board)
    # (1,0) and (2,1) both wait for (1,1) to leave.
    assert set(order) == {
        Move(Cell(0, 0), W),
        Move(Cell(1, 1), W),
        Move(Cell(1, 0), NE),
        Move(Cell(2, 1), W),
    }
    first = order.index(Move(Cell(1, 1), W))
    assert first < order.index(Move(Cell(1, 0), NE))
    assert first < order.index(Move(Cell(2, 1), W))
    assert SolutionValidator.validate(board, order, removal_target=4)


def test_exit_order_leaves_board_alone() -> None:
    board = _board("##", (0, 0, W))
    Solver.exit_order(board)
    assert Cell(0, 0) in board
