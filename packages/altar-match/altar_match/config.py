"""Match engine configuration dataclass."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class MatchConfig:
    """Immutable tuning for drop acceptance and drag feedback.

    Attributes:
        min_snap_threshold: Smallest accepted drop distance, in world units.
        snap_ratio: Threshold per unit of layout ``spread_x``.
        drag_lift: z offset given to the dragged token so it draws above its neighbors.
    """

    min_snap_threshold: float = 0.8
    snap_ratio: float = 0.7
    drag_lift: float = 0.1


DEFAULT_CONFIG = MatchConfig()
