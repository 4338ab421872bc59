"""Screen <-> layout-space mapping for an orthographic camera looking down -z.

World origin sits at the canvas center, +y is up, and one world unit spans
``cam_zoom`` pixels. The canvas is always landscape; on a portrait window it
is centered and overflows, so ``offset_x``/``offset_y`` may be negative.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable

from altar_layout.solver import LayoutParams


@dataclass(frozen=True, slots=True)
class Viewport:
    width: float
    height: float
    offset_x: float = 0.0
    offset_y: float = 0.0

    @classmethod
    def from_window(cls, window_width: float, window_height: float) -> Viewport:
        """Landscape canvas (longer side as width) centered in the window."""
        width = max(window_width, window_height)
        height = min(window_width, window_height)
        return cls(
            width=width,
            height=height,
            offset_x=(window_width - width) / 2,
            offset_y=(window_height - height) / 2,
        )


def to_world(
    px: float, py: float, viewport: Viewport, params: LayoutParams
) -> tuple[float, float]:
    """Window pixel -> world (x, y) on the z=0 plane."""
    cx = px - viewport.offset_x - viewport.width / 2
    cy = viewport.height / 2 - (py - viewport.offset_y)
    return cx / params.cam_zoom, cy / params.cam_zoom


def to_screen(
    x: float, y: float, viewport: Viewport, params: LayoutParams
) -> tuple[int, int]:
    """World (x, y) -> window pixel, rounded to the nearest pixel."""
    px = viewport.offset_x + viewport.width / 2 + x * params.cam_zoom
    py = viewport.offset_y + viewport.height / 2 - y * params.cam_zoom
    return round(px), round(py)


def hit_plane_contains(x: float, y: float, params: LayoutParams) -> bool:
    """True if the point lies on the invisible pointer-capture plane."""
    return (
        abs(x) <= params.hit_plane_width / 2
        and abs(y) <= params.hit_plane_height / 2
    )


def pick(
    x: float,
    y: float,
    positions: Iterable[tuple[int, tuple[float, ...]]],
    radius: float,
) -> int | None:
    """Return the id of the nearest position within *radius* of (x, y), else None.

    *positions* yields ``(id, (px, py, ...))``; only the first two axes count.
    Ties keep the earlier entry.
    """
    best: int | None = None
    best_dist = math.inf
    for pid, pos in positions:
        dist = math.hypot(pos[0] - x, pos[1] - y)
        if dist <= radius and dist < best_dist:
            best = pid
            best_dist = dist
    return best
