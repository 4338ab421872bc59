"""Layout tuning constants."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class LayoutPolicy:
    """Immutable tuning for the responsive layout solver.

    Attributes:
        min_aspect: Aspect ratio floor; near-square viewports are treated as this.
        narrow_width: Landscape widths below this use the narrow spread and zoom.
        reference_height: Height at which scale_factor is 1.0.
        scale_min: Lower clamp for scale_factor.
        scale_max: Upper clamp for scale_factor.
        narrow_spread: Base column spread on narrow viewports.
        wide_spread: Base column spread on wide viewports.
        spread_min: Lower clamp for spread_x.
        spread_max: Upper clamp for spread_x.
        band_offset: Distance of the target/token bands from y=0 at scale 1.0.
        zoom_divisor: Height divisor for the camera zoom.
        narrow_zoom: Zoom multiplier on narrow viewports.
        wide_zoom: Zoom multiplier on wide viewports.
        zoom_min: Lower clamp for cam_zoom.
        zoom_max: Upper clamp for cam_zoom.
        plane_min_width: Smallest hit-plane width.
        plane_min_height: Smallest hit-plane height.
        plane_width_ratio: Hit-plane width per unit of spread_x.
        plane_height_ratio: Hit-plane height per unit of band distance.
    """

    min_aspect: float = 16 / 9
    narrow_width: float = 900
    reference_height: float = 700
    scale_min: float = 0.7
    scale_max: float = 1.4
    narrow_spread: float = 1.1
    wide_spread: float = 2.0
    spread_min: float = 0.9
    spread_max: float = 2.6
    band_offset: float = 0.9
    zoom_divisor: float = 6
    narrow_zoom: float = 0.95
    wide_zoom: float = 1.1
    zoom_min: float = 40
    zoom_max: float = 120
    plane_min_width: float = 30
    plane_min_height: float = 18
    plane_width_ratio: float = 10
    plane_height_ratio: float = 8


DEFAULT_POLICY = LayoutPolicy()
