"""Hex grid model: cells, the six directions, and template shapes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Iterable, Iterator, NamedTuple


class Direction(StrEnum):
    EAST = "east"
    SOUTH_EAST = "south_east"
    SOUTH_WEST = "south_west"
    WEST = "west"
    NORTH_WEST = "north_west"
    NORTH_EAST = "north_east"

    @property
    def delta(self) -> tuple[int, int]:
        return _DELTAS[self]

    @property
    def opposite(self) -> Direction:
        return _OPPOSITES[self]

    @property
    def symbol(self) -> str:
        return _SYMBOLS[self]


# Fixed, closed tables -- axial neighbour offsets in enum order.  ``x`` is the
# template column and grows east; ``y`` is the template row and grows north, so
# NORTH_EAST is one row up and half a cell east.
_DELTAS: dict[Direction, tuple[int, int]] = {
    Direction.EAST: (1, 0),
    Direction.SOUTH_EAST: (1, -1),
    Direction.SOUTH_WEST: (0, -1),
    Direction.WEST: (-1, 0),
    Direction.NORTH_WEST: (-1, 1),
    Direction.NORTH_EAST: (0, 1),
}

_OPPOSITES: dict[Direction, Direction] = {
    Direction.EAST: Direction.WEST,
    Direction.SOUTH_EAST: Direction.NORTH_WEST,
    Direction.SOUTH_WEST: Direction.NORTH_EAST,
    Direction.WEST: Direction.EAST,
    Direction.NORTH_WEST: Direction.SOUTH_EAST,
    Direction.NORTH_EAST: Direction.SOUTH_WEST,
}

_SYMBOLS: dict[Direction, str] = {
    Direction.EAST: "→",
    Direction.SOUTH_EAST: "↘",
    Direction.SOUTH_WEST: "↙",
    Direction.WEST: "←",
    Direction.NORTH_WEST: "↖",
    Direction.NORTH_EAST: "↗",
}

DIRECTIONS: tuple[Direction, ...] = tuple(Direction)


class Cell(NamedTuple):
    """A hex cell: ``x`` is the template column, ``y`` the template row."""

    x: int
    y: int

    def step(self, direction: Direction) -> Cell:
        dx, dy = direction.delta
        return Cell(self.x + dx, self.y + dy)

    def to_list(self) -> list[int]:
        return [self.x, self.y]

    @classmethod
    def from_list(cls, coord: Iterable[int]) -> Cell:
        x, y = coord
        return cls(int(x), int(y))


# -- template shapes ----------------------------------------------------------

_VALID_MARKS = frozenset("#X1")


@dataclass(frozen=True)
class GridShape:
    """Boolean membership table over a rectangular row/column template.

    ``rows[y][x]`` is True when cell ``(x, y)`` belongs to the grid.  Rows
    may have different lengths; missing entries count as invalid.
    """

    rows: tuple[tuple[bool, ...], ...]

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_rows(cls, rows: Iterable[Iterable[bool]]) -> GridShape:
        return cls(rows=tuple(tuple(bool(v) for v in row) for row in rows))

    @classmethod
    def from_text(cls, text: str) -> GridShape:
        """Parse a template, one line per row.

        The first line is row ``y = 0``, the southern-most row.

        Example::

            GridShape.from_text('''
                ##.
                ###
            ''')
        """
        lines = [line.strip() for line in text.splitlines() if line.strip()]
        return cls.from_rows([ch in _VALID_MARKS for ch in line] for line in lines)

    @classmethod
    def rectangle(cls, width: int, height: int) -> GridShape:
        return cls.from_rows([True] * width for _ in range(height))

    @classmethod
    def hexagon(cls, radius: int) -> GridShape:
        """Axial hexagon of *radius* centred in a ``(2r+1)`` square template."""
        side = 2 * radius + 1
        rows = []
        for y in range(side):
            dy = y - radius
            rows.append(
                [max(abs(x - radius), abs(dy), abs(x - radius + dy)) <= radius
                 for x in range(side)]
            )
        return cls.from_rows(rows)

    # -- queries --------------------------------------------------------------

    def valid_cells(self) -> Iterator[Cell]:
        for y, row in enumerate(self.rows):
            for x, valid in enumerate(row):
                if valid:
                    yield Cell(x, y)

    def to_text(self) -> str:
        return "\n".join(
            "".join("#" if v else "." for v in row) for row in self.rows
        )


class Grid:
    """Immutable set of valid cells built once from a :class:`GridShape`."""

    __slots__ = ("shape", "cells", "_members")

    def __init__(self, shape: GridShape) -> None:
        self.shape = shape
        self.cells: tuple[Cell, ...] = tuple(shape.valid_cells())
        self._members: frozenset[Cell] = frozenset(self.cells)

    @classmethod
    def from_shape(cls, shape: GridShape) -> Grid:
        return cls(shape)

    def is_valid(self, cell: Cell) -> bool:
        return cell in self._members

    @staticmethod
    def neighbor(cell: Cell, direction: Direction) -> Cell:
        """Raw neighbour -- no bounds check, see :meth:`is_valid`."""
        return cell.step(direction)

    def neighbors(self, cell: Cell) -> list[tuple[Direction, Cell]]:
        result: list[tuple[Direction, Cell]] = []
        for direction in DIRECTIONS:
            nxt = cell.step(direction)
            if nxt in self._members:
                result.append((direction, nxt))
        return result

    def __contains__(self, cell: object) -> bool:
        return cell in self._members

    def __len__(self) -> int:
        return len(self.cells)

    def __iter__(self) -> Iterator[Cell]:
        return iter(self.cells)

    def __repr__(self) -> str:
        return f"Grid({len(self.cells)} cells)"
