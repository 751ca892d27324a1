"""Slide resolver and move replay on small hand-built boards."""

from __future__ import annotations

from hexaway.engine.gameplay import MoveOutcome, Replay, blocker_of, resolve_slide, slide_path
from hexaway.models.board import Board, Move, Piece
from hexaway.models.grid import Cell, Direction, Grid, GridShape

E, W = Direction.EAST, Direction.WEST


# -- helpers ------------------------------------------------------------------


def _row_board(*pieces: tuple[int, Direction]) -> Board:
    """A 1-row, 3-cell board with pieces at the given columns."""
    board = Board(Grid.from_shape(GridShape.from_text("###")))
    for x, direction in pieces:
        board.place(Piece(Cell(x, 0), direction, 0))
    return board


# -- resolve_slide ------------------------------------------------------------


def test_lone_piece_exits_from_last_cell() -> None:
    board = _row_board((0, E))
    result = resolve_slide(board, Cell(0, 0), E)
    assert result.end_cell == Cell(2, 0)
    assert result.exited_grid is True


def test_edge_piece_facing_out_exits_without_travelling() -> None:
    board = _row_board((2, E))
    result = resolve_slide(board, Cell(2, 0), E)
    assert result.end_cell == Cell(2, 0)
    assert result.exited_grid is True
    assert result.moved_from(Cell(2, 0))


def test_stops_on_cell_before_blocker() -> None:
    board = _row_board((0, E), (2, W))
    result = resolve_slide(board, Cell(0, 0), E)
    assert result.end_cell == Cell(1, 0)
    assert result.exited_grid is False


def test_immediately_blocked_piece_stays_put() -> None:
    board = _row_board((0, E), (1, E))
    result = resolve_slide(board, Cell(0, 0), E)
    assert result.end_cell == Cell(0, 0)
    assert result.exited_grid is False
    assert not result.moved_from(Cell(0, 0))


def test_resolve_slide_does_not_mutate_board() -> None:
    board = _row_board((0, E), (2, W))
    before = dict(board.pieces)
    resolve_slide(board, Cell(0, 0), E)
    assert board.pieces == before


def test_slide_path_and_blocker() -> None:
    board = _row_board((0, E), (2, W))
    assert slide_path(board, Cell(0, 0), E) == [Cell(0, 0), Cell(1, 0)]
    assert blocker_of(board, Cell(0, 0), E) == Cell(2, 0)
    assert blocker_of(board, Cell(2, 0), E) is None


# -- Replay -------------------------------------------------------------------


def test_replay_exit_removes_piece() -> None:
    game = Replay(_row_board((0, E)))
    assert game.apply(Move(Cell(0, 0), E)) is MoveOutcome.EXITED
    assert len(game.board) == 0
    assert game.removed == 1
    assert game.is_won(1)


def test_replay_move_reinserts_at_end_cell() -> None:
    game = Replay(_row_board((0, E), (2, W)))
    assert game.apply(Move(Cell(0, 0), E)) is MoveOutcome.MOVED
    piece = game.board.get(Cell(1, 0))
    assert piece is not None
    assert piece.position == Cell(1, 0)
    assert Cell(0, 0) not in game.board


def test_replay_rejects_blocked_and_missing_without_change() -> None:
    board = _row_board((0, E), (1, E))
    game = Replay(board)
    assert game.apply(Move(Cell(0, 0), E)) is MoveOutcome.BLOCKED
    assert game.apply(Move(Cell(2, 0), E)) is MoveOutcome.MISSING
    assert game.board.pieces == board.pieces
    assert game.moves == 0


def test_replay_works_on_a_copy() -> None:
    board = _row_board((0, E))
    Replay(board).apply(Move(Cell(0, 0), E))
    assert Cell(0, 0) in board


def test_replay_refuses_move_against_facing() -> None:
    board = _row_board((1, E))
    game = Replay(board)
    assert game.apply(Move(Cell(1, 0), W)) is MoveOutcome.WRONG_WAY
    assert not MoveOutcome.WRONG_WAY.is_legal
    assert game.board.pieces == board.pieces
