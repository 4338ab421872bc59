"""Intro scene. Stands in for the intro video with a fading text crawl."""
from __future__ import annotations

import pygame

from ui.constants import BG_INTRO, TEXT_COLOR
from ui.text import blit_centered, font

INTRO_LINES = [
    "Long before the signal fractured,",
    "every essence sang in tune.",
    "Now they sleep on the altar,",
    "waiting for someone to listen.",
]


def draw_intro(surface: pygame.Surface, progress: float) -> None:
    """*progress* runs 0..1 over the intro's length."""
    w, h = surface.get_size()
    surface.fill(BG_INTRO)

    n = len(INTRO_LINES)
    idx = min(int(progress * n), n - 1)
    local = progress * n - idx
    # fade in over the first quarter of each line, out over the last
    alpha = min(1.0, local * 4, (1.0 - local) * 4)
    color = tuple(int(c * max(0.0, alpha)) for c in TEXT_COLOR)
    blit_centered(surface, font(max(16, h // 26)), INTRO_LINES[idx], color, (w // 2, h // 2))
