from hexaway.models.board import Board, Move, Piece
from hexaway.models.grid import DIRECTIONS, Cell, Direction, Grid, GridShape
from hexaway.models.level import DEFAULT_PALETTE, DifficultyParams, Level

__all__ = [
    "Board",
    "Cell",
    "DEFAULT_PALETTE",
    "DIRECTIONS",
    "DifficultyParams",
    "Direction",
    "Grid",
    "GridShape",
    "Level",
    "Move",
    "Piece",
]
