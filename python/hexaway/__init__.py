"""Hexagonal sliding-piece puzzle generation and validation."""

from hexaway.engine.gamegenerator import LevelGenerator
from hexaway.errors import (
    GenerationExhaustedError,
    HexawayError,
    TemplateError,
    ValidationMismatchError,
)
from hexaway.models import DifficultyParams, Grid, GridShape, Level

__all__ = [
    "DifficultyParams",
    "GenerationExhaustedError",
    "Grid",
    "GridShape",
    "HexawayError",
    "Level",
    "LevelGenerator",
    "TemplateError",
    "ValidationMismatchError",
]
