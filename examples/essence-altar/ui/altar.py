"""Altar hub renderer."""
from __future__ import annotations

import math
import random

import pygame

from altar_layout import LayoutParams, Viewport, to_screen
from altar_scene import SceneMachine

from game.hub import altar_essences, bob_offset, essence_radius
from ui.constants import ALTAR_EDGE, ALTAR_STONE, BG_ALTAR, TEXT_DIM
from ui.text import blit_centered, font

_rng = random.Random(7)
_SPARKLES = [
    (_rng.uniform(-5.0, 5.0), _rng.uniform(-2.5, 2.5), _rng.uniform(0.0, 2 * math.pi))
    for _ in range(120)
]


def draw_altar(
    surface: pygame.Surface,
    viewport: Viewport,
    layout: LayoutParams,
    machine: SceneMachine,
    elapsed: float,
) -> None:
    w, h = surface.get_size()
    surface.fill(BG_ALTAR)
    zoom = layout.cam_zoom

    for sx, sy, phase in _SPARKLES:
        px, py = to_screen(sx, sy, viewport, layout)
        if not (0 <= px < w and 0 <= py < h):
            continue
        glow = 0.5 + 0.5 * math.sin(elapsed * 0.3 * 2 * math.pi + phase)
        surface.set_at((px, py), (int(227 * glow), int(187 * glow), int(255 * glow)))

    # altar slab under the essences
    left, top = to_screen(-3.0, -0.9, viewport, layout)
    right, bottom = to_screen(3.0, -1.6, viewport, layout)
    slab = pygame.Rect(left, top, right - left, bottom - top)
    pygame.draw.rect(surface, ALTAR_STONE, slab, border_radius=6)
    pygame.draw.rect(surface, ALTAR_EDGE, slab, 2, border_radius=6)

    for essence in altar_essences():
        interactive = not machine.is_collected(essence.id)
        y = essence.y + bob_offset(elapsed, interactive)
        center = to_screen(essence.x, y, viewport, layout)
        radius = max(4, int(essence_radius(interactive) * zoom))
        color = pygame.Color(essence.color)
        if interactive:
            halo = pygame.Surface((radius * 4, radius * 4), pygame.SRCALPHA)
            pygame.draw.circle(halo, (color.r, color.g, color.b, 60), (radius * 2, radius * 2), radius * 2)
            surface.blit(halo, (center[0] - radius * 2, center[1] - radius * 2))
        else:
            color = color.lerp((0, 0, 0), 0.4)
        pygame.draw.circle(surface, color, center, radius)

    collected = len(machine.collected_essences)
    total = len(altar_essences())
    blit_centered(
        surface, font(14), f"Essences restored: {collected}/{total}", TEXT_DIM, (w // 2, h - 28)
    )
