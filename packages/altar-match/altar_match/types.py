"""Shared types for the match engine."""
from __future__ import annotations

from dataclasses import dataclass

from altar_layout import Vec3

TokenId = int


@dataclass
class Token:
    """Draggable catalyst. Once ``is_matched`` it never moves by user input again."""

    id: TokenId
    position: Vec3
    label: str = ""
    color: str = ""
    is_matched: bool = False


@dataclass(frozen=True, slots=True)
class Target:
    """Fixed echo. Token k only ever matches the target with id k."""

    id: TokenId
    position: Vec3
    label: str = ""
    color: str = ""


@dataclass(frozen=True, slots=True)
class DropResult:
    """Outcome of one committed drag. Not stored by the engine."""

    token_id: TokenId
    matched: bool
    distance: float
    threshold: float


class PuzzleDefinitionError(ValueError):
    """Raised when a puzzle definition cannot produce a consistent board."""
