"""Difficulty parameters and the exported level record."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any

from hexaway.models.board import Move, Piece
from hexaway.models.grid import GridShape

# Blue, green, red, yellow, purple, orange.
DEFAULT_PALETTE: tuple[str, ...] = (
    "#3366CC",
    "#33CC66",
    "#CC4D4D",
    "#CCB333",
    "#994DCC",
    "#E68033",
)

_CAMEL_KEYS = {
    "targetMoveCount": "target_move_count",
    "pieceCount": "piece_count",
    "directionChangeRate": "direction_change_rate",
    "bottleneckCount": "bottleneck_count",
    "specialPieceRate": "special_piece_rate",
    "difficultyTolerance": "difficulty_tolerance",
    "removalFraction": "removal_fraction",
    "moveLimitMultiplier": "move_limit_multiplier",
}


@dataclass(frozen=True)
class DifficultyParams:
    """Caller-supplied tuning knobs.  Never mutated by the engine."""

    target_move_count: int = 10
    piece_count: int = 8
    direction_change_rate: float = 0.3
    bottleneck_count: int = 1
    special_piece_rate: float = 0.0
    difficulty_tolerance: float = 0.2
    removal_fraction: float = 0.6
    move_limit_multiplier: float = 1.5

    def __post_init__(self) -> None:
        if self.target_move_count < 1:
            raise ValueError("target_move_count must be at least 1.")
        if self.piece_count < 1:
            raise ValueError("piece_count must be at least 1.")
        if self.bottleneck_count < 0:
            raise ValueError("bottleneck_count must not be negative.")
        for name in ("direction_change_rate", "special_piece_rate", "difficulty_tolerance"):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                raise ValueError(f"{name} must be within [0, 1], got {value}.")
        if not 0.0 < self.removal_fraction <= 1.0:
            raise ValueError(
                f"removal_fraction must be within (0, 1], got {self.removal_fraction}."
            )
        if self.move_limit_multiplier < 1.0:
            raise ValueError(
                f"move_limit_multiplier must be >= 1, got {self.move_limit_multiplier}."
            )

    @property
    def target_difficulty(self) -> int:
        return 10 * self.target_move_count + 3 * self.piece_count

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> DifficultyParams:
        """Build from a mapping with camelCase or snake_case keys.

        Unknown keys are ignored.
        """
        known = {f.name for f in fields(cls)}
        kwargs: dict[str, Any] = {}
        for key, value in data.items():
            name = _CAMEL_KEYS.get(key, key)
            if name in known:
                kwargs[name] = value
        return cls(**kwargs)

    def to_dict(self) -> dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


@dataclass(frozen=True)
class Level:
    """A finished, validated level -- everything rendering and storage need."""

    level_number: int
    name: str
    grid_shape: GridShape
    color_palette: tuple[str, ...]
    pieces: tuple[Piece, ...]
    move_limit: int
    removal_target: int
    solution: tuple[Move, ...]
    strategy: str
    difficulty: int
    seed: int | None = None

    @property
    def piece_count(self) -> int:
        return len(self.pieces)

    def to_dict(self) -> dict[str, Any]:
        return {
            "level_number": self.level_number,
            "name": self.name,
            "seed": self.seed,
            "grid": self.grid_shape.to_text().splitlines(),
            "color_palette": list(self.color_palette),
            "pieces": [p.to_dict() for p in self.pieces],
            "move_limit": self.move_limit,
            "removal_target": self.removal_target,
            "solution": [m.to_dict() for m in self.solution],
            "strategy": self.strategy,
            "difficulty": self.difficulty,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Level:
        return cls(
            level_number=int(data["level_number"]),
            name=data["name"],
            seed=data.get("seed"),
            grid_shape=GridShape.from_text("\n".join(data["grid"])),
            color_palette=tuple(data["color_palette"]),
            pieces=tuple(Piece.from_dict(p) for p in data["pieces"]),
            move_limit=int(data["move_limit"]),
            removal_target=int(data["removal_target"]),
            solution=tuple(Move.from_dict(m) for m in data["solution"]),
            strategy=data["strategy"],
            difficulty=int(data["difficulty"]),
        )
