"""Splash screen with the start button."""
from __future__ import annotations

import pygame

from ui.constants import BG_SPLASH, SPLASH_ACCENT, TEXT_DIM
from ui.text import blit_centered, font


def start_button_rect(surface: pygame.Surface) -> pygame.Rect:
    w, h = surface.get_size()
    rect = pygame.Rect(0, 0, 240, 56)
    rect.center = (w // 2, int(h * 0.65))
    return rect


def draw_splash(surface: pygame.Surface, hovered: bool, loading: bool) -> None:
    w, h = surface.get_size()
    surface.fill(BG_SPLASH)

    blit_centered(surface, font(max(24, h // 14)), "ESSENCE ALTAR", SPLASH_ACCENT, (w // 2, h // 3))
    blit_centered(surface, font(max(12, h // 45)), "an interactive constellation", TEXT_DIM, (w // 2, h // 3 + h // 12))

    rect = start_button_rect(surface)
    if hovered and not loading:
        fill = pygame.Surface(rect.size, pygame.SRCALPHA)
        fill.fill((*SPLASH_ACCENT, 50))
        surface.blit(fill, rect.topleft)
    pygame.draw.rect(surface, SPLASH_ACCENT, rect, 2, border_radius=rect.height // 2)
    label = "LOADING..." if loading else "START GAME"
    blit_centered(surface, font(20), label, SPLASH_ACCENT, rect.center)
