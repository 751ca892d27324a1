"""Tracks the state of one generation attempt."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import StrEnum

from hexaway.models.board import Board, Move
from hexaway.models.grid import Cell

logger = logging.getLogger(__name__)


class BuildPhase(StrEnum):
    SEEDING = "seeding"
    EXTENDING = "extending"
    VALIDATING = "validating"
    DONE = "done"
    FAILED = "failed"


_TRANSITIONS: dict[BuildPhase, frozenset[BuildPhase]] = {
    BuildPhase.SEEDING: frozenset({BuildPhase.EXTENDING, BuildPhase.FAILED}),
    BuildPhase.EXTENDING: frozenset({BuildPhase.VALIDATING, BuildPhase.FAILED}),
    BuildPhase.VALIDATING: frozenset({BuildPhase.DONE, BuildPhase.FAILED}),
    BuildPhase.DONE: frozenset(),
    BuildPhase.FAILED: frozenset(),
}


@dataclass(frozen=True)
class BuildResult:
    """A start board plus the forward solution that clears it."""

    board: Board
    solution: tuple[Move, ...]
    strategy: str


class BuildState:
    """Holds the working board, the recorded moves and the current phase."""

    def __init__(self, board: Board, strategy: str) -> None:
        self.board = board
        self.strategy = strategy
        self.moves: list[Move] = []
        self.static_cells: set[Cell] = set()
        # Board expected once the construction moves have been played.
        self.final = Board(board.grid)
        # Cells some piece has stood on or slid across.
        self.used: set[Cell] = set()
        self.phase = BuildPhase.SEEDING
        self.reason: str = ""

    # -- phases ---------------------------------------------------------------

    def advance(self, phase: BuildPhase, reason: str = "") -> None:
        if phase not in _TRANSITIONS[self.phase]:
            raise RuntimeError(f"Illegal build transition {self.phase} -> {phase}.")
        logger.debug("%s builder: %s -> %s %s", self.strategy, self.phase, phase, reason)
        self.phase = phase
        self.reason = reason

    def fail(self, reason: str) -> None:
        self.advance(BuildPhase.FAILED, reason)

    @property
    def is_done(self) -> bool:
        return self.phase is BuildPhase.DONE

    # -- moves ----------------------------------------------------------------

    def record(self, move: Move) -> None:
        self.moves.append(move)

    def result(self) -> BuildResult:
        if not self.is_done:
            raise RuntimeError(f"Build not finished (phase {self.phase}).")
        return BuildResult(self.board.copy(), tuple(self.moves), self.strategy)
