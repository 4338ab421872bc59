"""Responsive layout solver - viewport dimensions to puzzle geometry."""
from __future__ import annotations

import math
from dataclasses import dataclass

from altar_layout.policy import DEFAULT_POLICY, LayoutPolicy

Vec3 = tuple[float, float, float]


@dataclass(frozen=True, slots=True)
class LayoutParams:
    """Geometry derived from one viewport size. Never stored, always re-solved.

    ``width``/``height`` are the orientation-normalized inputs (longer side
    first), so a portrait and a landscape viewport of the same size compare
    equal.
    """

    width: float
    height: float
    aspect: float
    is_narrow: bool
    scale_factor: float
    spread_x: float
    y_top: float
    y_bottom: float
    cam_zoom: int
    hit_plane_width: float
    hit_plane_height: float


def _clamp(value: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, value))


def _round_half_up(value: float) -> int:
    # Halves round toward +inf, so 59.5 -> 60 rather than banker's 60/59.
    return math.floor(value + 0.5)


def solve(
    viewport_width: float,
    viewport_height: float,
    policy: LayoutPolicy = DEFAULT_POLICY,
) -> LayoutParams:
    """Derive layout parameters for a viewport. Pure and deterministic.

    Raises ``ValueError`` for non-finite dimensions. Negative dimensions are
    treated as zero; a zero height is guarded in the aspect computation.
    """
    if not (math.isfinite(viewport_width) and math.isfinite(viewport_height)):
        raise ValueError(
            f"viewport dimensions must be finite, got {viewport_width!r}x{viewport_height!r}"
        )
    w = max(0.0, float(viewport_width))
    h = max(0.0, float(viewport_height))
    vw, vh = max(w, h), min(w, h)

    aspect = max(vw / max(vh, 1.0), policy.min_aspect)
    is_narrow = vw < policy.narrow_width

    scale_factor = _clamp(vh / policy.reference_height, policy.scale_min, policy.scale_max)

    base_spread = policy.narrow_spread if is_narrow else policy.wide_spread
    spread_x = _clamp(
        base_spread * (aspect / policy.min_aspect) * scale_factor,
        policy.spread_min,
        policy.spread_max,
    )

    y_top = policy.band_offset * scale_factor
    y_bottom = -policy.band_offset * scale_factor

    zoom_mult = policy.narrow_zoom if is_narrow else policy.wide_zoom
    cam_zoom = _round_half_up(
        _clamp((vh / policy.zoom_divisor) * zoom_mult, policy.zoom_min, policy.zoom_max)
    )

    return LayoutParams(
        width=vw,
        height=vh,
        aspect=aspect,
        is_narrow=is_narrow,
        scale_factor=scale_factor,
        spread_x=spread_x,
        y_top=y_top,
        y_bottom=y_bottom,
        cam_zoom=cam_zoom,
        hit_plane_width=max(policy.plane_min_width, spread_x * policy.plane_width_ratio),
        hit_plane_height=max(
            policy.plane_min_height, (y_top - y_bottom) * policy.plane_height_ratio
        ),
    )


def column_slots(params: LayoutParams, y: float, count: int = 3) -> list[Vec3]:
    """Evenly spaced slots on a horizontal band, ``spread_x`` apart, centered on x=0."""
    if count < 0:
        raise ValueError(f"count must be >= 0, got {count}")
    mid = (count - 1) / 2
    return [((i - mid) * params.spread_x, y, 0.0) for i in range(count)]


def catalyst_slots(params: LayoutParams, count: int = 3) -> list[Vec3]:
    """Resting slots for draggable tokens (bottom band)."""
    return column_slots(params, params.y_bottom, count)


def echo_slots(params: LayoutParams, count: int = 3) -> list[Vec3]:
    """Fixed slots for targets (top band)."""
    return column_slots(params, params.y_top, count)
