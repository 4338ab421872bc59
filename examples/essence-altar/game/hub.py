"""Altar hub: where each catalog essence rests and whether it can be picked."""
from __future__ import annotations

import math
from dataclasses import dataclass

from altar_match import PUZZLES

ESSENCE_SPACING = 1.6
ESSENCE_Y = -0.4
BOB_SPEED = 1.5
BOB_HEIGHT = 0.1
ESSENCE_RADIUS = 0.5
ESSENCE_RADIUS_STATIC = 0.45


@dataclass(frozen=True)
class AltarEssence:
    id: int
    color: str
    x: float
    y: float


def altar_essences() -> list[AltarEssence]:
    """One essence per catalog puzzle, in a row centered on the altar."""
    puzzles = sorted(PUZZLES.values(), key=lambda p: p.essence_id)
    mid = (len(puzzles) - 1) / 2
    return [
        AltarEssence(
            id=p.essence_id,
            color=p.essence_color,
            x=(i - mid) * ESSENCE_SPACING,
            y=ESSENCE_Y,
        )
        for i, p in enumerate(puzzles)
    ]


def bob_offset(elapsed: float, interactive: bool) -> float:
    """Uncollected essences float; collected ones rest still."""
    if not interactive:
        return 0.0
    return math.sin(elapsed * BOB_SPEED) * BOB_HEIGHT


def essence_radius(interactive: bool) -> float:
    return ESSENCE_RADIUS if interactive else ESSENCE_RADIUS_STATIC
