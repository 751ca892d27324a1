"""Error hierarchy for level generation.

Usage::

    from hexaway.errors import GenerationExhaustedError

    try:
        level = generator.generate(1, seed=7)
    except GenerationExhaustedError as e:
        logger.error("giving up on level 1: %s", e.message)
"""

from __future__ import annotations

from typing import Any

__all__ = [
    "GenerationExhaustedError",
    "HexawayError",
    "TemplateError",
    "ValidationMismatchError",
]


class HexawayError(Exception):
    """Base exception for all generator errors.

    Attributes:
        code: Machine-readable error code
        message: Human-readable description
        context: Extra detail for debugging
    """

    code: str = "HEXAWAY_ERROR"

    def __init__(self, message: str, **context: Any) -> None:
        super().__init__(message)
        self.message = message
        self.context = context

    def __str__(self) -> str:
        if not self.context:
            return self.message
        detail = ", ".join(f"{k}={v}" for k, v in self.context.items())
        return f"{self.message} ({detail})"


class TemplateError(HexawayError, ValueError):
    """The grid template or the difficulty request cannot work at all."""

    code = "TEMPLATE_ERROR"


class GenerationExhaustedError(HexawayError):
    """Every backward attempt and the fallback builder failed."""

    code = "GENERATION_EXHAUSTED"


class ValidationMismatchError(HexawayError):
    """A recorded solution does not replay on its start board."""

    code = "VALIDATION_MISMATCH"
