"""Font cache and centered/wrapped text helpers."""
from __future__ import annotations

import pygame

_fonts: dict[int, pygame.font.Font] = {}


def font(size: int) -> pygame.font.Font:
    size = max(8, size)
    cached = _fonts.get(size)
    if cached is None:
        cached = pygame.font.SysFont("monospace", size)
        _fonts[size] = cached
    return cached


def wrap(f: pygame.font.Font, text: str, max_width: int) -> list[str]:
    """Greedy word wrap. A single word wider than max_width gets its own line."""
    lines: list[str] = []
    current = ""
    for word in text.split():
        candidate = f"{current} {word}" if current else word
        if current and f.size(candidate)[0] > max_width:
            lines.append(current)
            current = word
        else:
            current = candidate
    if current:
        lines.append(current)
    return lines


def blit_centered(
    surface: pygame.Surface,
    f: pygame.font.Font,
    text: str,
    color: tuple[int, int, int],
    center: tuple[int, int],
    max_width: int | None = None,
) -> None:
    """Draw text centered on a point, wrapping into stacked lines if needed."""
    lines = wrap(f, text, max_width) if max_width else [text]
    line_h = f.get_linesize()
    top = center[1] - line_h * len(lines) // 2
    for i, line in enumerate(lines):
        img = f.render(line, True, color)
        surface.blit(img, (center[0] - img.get_width() // 2, top + i * line_h))
