"""Scene identifiers."""
from __future__ import annotations

from enum import Enum


class Scene(str, Enum):
    SPLASH = "splash"
    INTRO = "intro"
    GAME = "game"
    PUZZLE_BRIEFING = "puzzle_briefing"
    PUZZLE_ORACLE = "puzzle_oracle"
