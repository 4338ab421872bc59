"""Briefing screen: one glowing line at a time."""
from __future__ import annotations

import pygame

from altar_scene import Briefing

from ui.constants import BG_BRIEFING, BRIEFING_GLOW, TEXT_COLOR
from ui.text import blit_centered, font


def draw_briefing(surface: pygame.Surface, briefing: Briefing | None) -> None:
    w, h = surface.get_size()
    surface.fill(BG_BRIEFING)
    if briefing is None or briefing.current_line is None:
        return

    # fade each line in over its first third
    alpha = min(1.0, briefing.progress * 3)
    f = font(max(16, min(24, w // 40)))
    max_width = min(800, w - 40)
    glow = tuple(int(c * alpha * 0.35) for c in BRIEFING_GLOW)
    color = tuple(int(c * alpha) for c in TEXT_COLOR)
    blit_centered(surface, f, briefing.current_line, glow, (w // 2 + 1, h // 2 + 1), max_width)
    blit_centered(surface, f, briefing.current_line, color, (w // 2, h // 2), max_width)
