"""Puzzle board and overlay renderer."""
from __future__ import annotations

import pygame

from altar_layout import Viewport, to_screen
from altar_match import MatchEngine

from ui.constants import (
    BG_PUZZLE,
    BUTTON_ACCENT,
    CATALYST_SIZE,
    ECHO_LABEL_GAP,
    ECHO_SIZE,
    STATUS_COLOR,
    TEXT_COLOR,
    TEXT_DIM,
)
from ui.text import blit_centered, font


def return_button_rect(surface: pygame.Surface) -> pygame.Rect:
    w, h = surface.get_size()
    rect = pygame.Rect(0, 0, 220, 44)
    rect.midbottom = (w // 2, h - 24)
    return rect


def draw_board(surface: pygame.Surface, engine: MatchEngine, viewport: Viewport) -> None:
    layout = engine.layout
    zoom = layout.cam_zoom
    scale = layout.scale_factor
    surface.fill(BG_PUZZLE)

    echo_r = ECHO_SIZE * scale * zoom
    for target in engine.targets:
        cx, cy = to_screen(target.position[0], target.position[1], viewport, layout)
        diamond = [(cx, cy - echo_r), (cx + echo_r, cy), (cx, cy + echo_r), (cx - echo_r, cy)]
        pygame.draw.polygon(surface, pygame.Color(target.color), diamond)
        label_y = cy - int(echo_r + ECHO_LABEL_GAP * scale * zoom)
        blit_centered(
            surface, font(int(0.24 * scale * zoom)), target.label, TEXT_COLOR,
            (cx, label_y - 10), max_width=int(3 * scale * zoom),
        )

    box = int(CATALYST_SIZE * scale * zoom)
    # lifted (dragged) tokens draw last so they sit above their neighbors
    for token in sorted(engine.tokens, key=lambda t: t.position[2]):
        cx, cy = to_screen(token.position[0], token.position[1], viewport, layout)
        rect = pygame.Rect(0, 0, box, box)
        rect.center = (cx, cy)
        color = pygame.Color(token.color)
        if token.is_matched:
            color = color.lerp((255, 255, 255), 0.25)
        pygame.draw.rect(surface, color, rect, border_radius=4)
        if token.id == engine.dragged_token_id:
            pygame.draw.rect(surface, (255, 255, 255), rect, 2, border_radius=4)
        blit_centered(
            surface, font(int(0.16 * scale * zoom)), token.label, TEXT_COLOR,
            rect.center, max_width=int(box * 0.9),
        )


def draw_overlay(
    surface: pygame.Surface,
    title: str,
    subtitle: str,
    status: str,
    hovered: bool,
) -> None:
    w, h = surface.get_size()
    blit_centered(surface, font(max(18, min(26, w // 50))), title, TEXT_COLOR, (w // 2, int(h * 0.05)))
    blit_centered(surface, font(max(12, min(16, w // 80))), subtitle, TEXT_DIM, (w // 2, int(h * 0.05) + 28))

    rect = return_button_rect(surface)
    if status:
        blit_centered(surface, font(18), status, STATUS_COLOR, (w // 2, rect.top - 28))

    if hovered:
        fill = pygame.Surface(rect.size, pygame.SRCALPHA)
        fill.fill((*BUTTON_ACCENT, 40))
        surface.blit(fill, rect.topleft)
    pygame.draw.rect(surface, BUTTON_ACCENT, rect, 2, border_radius=rect.height // 2)
    blit_centered(surface, font(16), "RETURN TO ALTAR", BUTTON_ACCENT, rect.center)
