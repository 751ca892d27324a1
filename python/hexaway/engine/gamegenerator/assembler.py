"""Turns a validated build into the exported level record."""

from __future__ import annotations

import math
from typing import Sequence

from hexaway.engine.gamestate.state import BuildResult
from hexaway.models.board import Move
from hexaway.models.grid import GridShape
from hexaway.models.level import DifficultyParams, Level


class LevelAssembler:
    """Pure data transformation -- all methods are static."""

    @staticmethod
    def move_limit(solution_length: int, multiplier: float) -> int:
        return math.ceil(solution_length * multiplier)

    @staticmethod
    def removal_target(piece_count: int, fraction: float) -> int:
        return math.ceil(piece_count * fraction)

    @staticmethod
    def difficulty(solution: Sequence[Move], piece_count: int) -> int:
        """``10`` per move, ``5`` per change of direction, ``3`` per piece."""
        changes = sum(
            1 for prev, cur in zip(solution, solution[1:]) if cur.direction != prev.direction
        )
        return 10 * len(solution) + 5 * changes + 3 * piece_count

    @staticmethod
    def assemble(
        result: BuildResult,
        shape: GridShape,
        palette: Sequence[str],
        params: DifficultyParams,
        level_number: int = 1,
        seed: int | None = None,
    ) -> Level:
        pieces = tuple(sorted(result.board, key=lambda p: (p.position.y, p.position.x)))
        solution = tuple(result.solution)
        return Level(
            level_number=level_number,
            name=f"Level {level_number}",
            seed=seed,
            grid_shape=shape,
            color_palette=tuple(palette),
            pieces=pieces,
            move_limit=LevelAssembler.move_limit(len(solution), params.move_limit_multiplier),
            removal_target=LevelAssembler.removal_target(len(pieces), params.removal_fraction),
            solution=solution,
            strategy=result.strategy,
            difficulty=LevelAssembler.difficulty(solution, len(pieces)),
        )
