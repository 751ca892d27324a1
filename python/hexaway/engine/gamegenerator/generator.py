"""Generates solvable, deadlock-free hex sliding levels."""

from __future__ import annotations

import logging
import random
from typing import Sequence

from hexaway.engine.gamegenerator.assembler import LevelAssembler
from hexaway.engine.gamegenerator.backward import BackwardBuilder
from hexaway.engine.gamegenerator.simple import SimpleBuilder
from hexaway.engine.gamestate.state import BuildResult
from hexaway.errors import GenerationExhaustedError, TemplateError
from hexaway.models.grid import Grid, GridShape
from hexaway.models.level import DEFAULT_PALETTE, DifficultyParams, Level

logger = logging.getLogger(__name__)

MAX_ATTEMPTS = 5


class LevelGenerator:
    """Entry point: grid shape + difficulty + seed in, :class:`Level` out.

    Tries the backward builder up to ``max_attempts`` times, then the simple
    builder.  One ``random.Random`` drives every attempt, so the same seed
    always yields the same level.
    """

    def __init__(
        self,
        shape: GridShape,
        params: DifficultyParams | None = None,
        palette: Sequence[str] = DEFAULT_PALETTE,
        max_attempts: int = MAX_ATTEMPTS,
    ) -> None:
        self.shape = shape
        self.grid = Grid.from_shape(shape)
        self.params = params if params is not None else DifficultyParams()
        self.palette = tuple(palette)
        self.max_attempts = max_attempts

        if len(self.grid) == 0:
            raise TemplateError("Grid template has no valid cells")
        if self.params.piece_count > len(self.grid):
            raise TemplateError(
                "More pieces requested than the grid has cells",
                piece_count=self.params.piece_count,
                cells=len(self.grid),
            )
        if not self.palette:
            raise TemplateError("Colour palette is empty")
        if max_attempts < 0:
            raise ValueError("max_attempts must not be negative.")

    # -- generation -----------------------------------------------------------

    def generate(self, level_number: int = 1, seed: int | None = None) -> Level:
        """Return one validated level; raises ``GenerationExhaustedError``."""
        rng = random.Random(seed)
        result = self.build(rng)
        level = LevelAssembler.assemble(
            result, self.shape, self.palette, self.params, level_number, seed
        )
        self._check_difficulty(level)
        logger.info(
            "Level %d: %d pieces, %d moves (%s builder)",
            level_number, level.piece_count, len(level.solution), level.strategy,
        )
        return level

    def generate_batch(
        self, count: int, start: int = 1, seed: int | None = None
    ) -> list[Level]:
        """Generate *count* levels numbered from *start*.

        Level ``start + i`` uses seed ``base + i`` where ``base`` is *seed*,
        or *start* when no seed is given.
        """
        base = start if seed is None else seed
        return [self.generate(start + i, seed=base + i) for i in range(count)]

    def build(self, rng: random.Random) -> BuildResult:
        """Run the retry/fallback ladder and return a validated build."""
        palette_size = len(self.palette)
        for attempt in range(1, self.max_attempts + 1):
            result = BackwardBuilder(self.grid, self.params, palette_size, rng).build()
            if result is not None:
                return result
            logger.debug("Backward attempt %d/%d failed", attempt, self.max_attempts)

        logger.warning(
            "All %d backward attempts failed, using the simple builder", self.max_attempts
        )
        result = SimpleBuilder(self.grid, self.params, palette_size, rng).build()
        if result is None:
            raise GenerationExhaustedError(
                "Could not build a solvable level",
                attempts=self.max_attempts,
                cells=len(self.grid),
                piece_count=self.params.piece_count,
            )
        return result

    # -- helpers --------------------------------------------------------------

    def _check_difficulty(self, level: Level) -> None:
        target = self.params.target_difficulty
        spread = self.params.difficulty_tolerance * target
        if abs(level.difficulty - target) > spread:
            logger.info(
                "Level %d difficulty %d outside %d ± %.0f",
                level.level_number, level.difficulty, target, spread,
            )
