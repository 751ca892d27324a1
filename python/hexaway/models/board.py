"""Board model: pieces keyed by the cell they occupy."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Iterator

from hexaway.models.grid import Cell, Direction, Grid


@dataclass(frozen=True)
class Piece:
    position: Cell
    direction: Direction
    color_index: int

    def moved_to(self, position: Cell, direction: Direction | None = None) -> Piece:
        """Return a copy at *position* (and facing *direction* if given)."""
        if direction is None:
            return replace(self, position=position)
        return replace(self, position=position, direction=direction)

    def to_dict(self) -> dict:
        return {
            "position": self.position.to_list(),
            "direction": self.direction.value,
            "color_index": self.color_index,
        }

    @classmethod
    def from_dict(cls, data: dict) -> Piece:
        return cls(
            position=Cell.from_list(data["position"]),
            direction=Direction(data["direction"]),
            color_index=int(data["color_index"]),
        )


@dataclass(frozen=True)
class Move:
    """Trigger the piece at ``position`` and slide it along ``direction``."""

    position: Cell
    direction: Direction

    def to_dict(self) -> dict:
        return {"position": self.position.to_list(), "direction": self.direction.value}

    @classmethod
    def from_dict(cls, data: dict) -> Move:
        return cls(Cell.from_list(data["position"]), Direction(data["direction"]))


@dataclass
class Board:
    """A position -> piece map restricted to the cells of ``grid``.

    Pieces are immutable, so :meth:`copy` only has to duplicate the map for
    speculative branches to stay independent of each other.
    """

    grid: Grid
    pieces: dict[Cell, Piece] = field(default_factory=dict)

    # -- mutation -------------------------------------------------------------

    def place(self, piece: Piece) -> None:
        if not self.grid.is_valid(piece.position):
            raise ValueError(f"Cell {tuple(piece.position)} is not part of the grid.")
        if piece.position in self.pieces:
            raise ValueError(f"Cell {tuple(piece.position)} is already occupied.")
        self.pieces[piece.position] = piece

    def remove(self, cell: Cell) -> Piece:
        return self.pieces.pop(cell)

    def relocate(self, old: Cell, piece: Piece) -> None:
        """Move the piece at *old* to ``piece.position`` in one step."""
        removed = self.pieces.pop(old)
        try:
            self.place(piece)
        except ValueError:
            self.pieces[old] = removed
            raise

    # -- queries --------------------------------------------------------------

    def get(self, cell: Cell) -> Piece | None:
        return self.pieces.get(cell)

    def is_free(self, cell: Cell) -> bool:
        return self.grid.is_valid(cell) and cell not in self.pieces

    def free_cells(self) -> list[Cell]:
        return [c for c in self.grid.cells if c not in self.pieces]

    def positions(self) -> set[Cell]:
        return set(self.pieces)

    def __contains__(self, cell: object) -> bool:
        return cell in self.pieces

    def __iter__(self) -> Iterator[Piece]:
        return iter(list(self.pieces.values()))

    def __len__(self) -> int:
        return len(self.pieces)

    def copy(self) -> Board:
        return Board(grid=self.grid, pieces=dict(self.pieces))
