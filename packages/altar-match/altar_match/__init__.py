"""altar-match - Drag-and-match puzzle engine."""
from __future__ import annotations

from altar_match.config import DEFAULT_CONFIG, MatchConfig
from altar_match.engine import MatchEngine
from altar_match.puzzles import (
    COMMUNICATION,
    PUZZLES,
    PieceSpec,
    PuzzleSpec,
    get_puzzle,
    puzzle_for_essence,
)
from altar_match.types import (
    DropResult,
    PuzzleDefinitionError,
    Target,
    Token,
    TokenId,
)

__all__ = [
    "COMMUNICATION",
    "DEFAULT_CONFIG",
    "DropResult",
    "MatchConfig",
    "MatchEngine",
    "PUZZLES",
    "PieceSpec",
    "PuzzleDefinitionError",
    "PuzzleSpec",
    "Target",
    "Token",
    "TokenId",
    "get_puzzle",
    "puzzle_for_essence",
]
