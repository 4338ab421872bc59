"""altar-layout - Responsive puzzle geometry and pointer projection."""
from __future__ import annotations

from altar_layout.policy import DEFAULT_POLICY, LayoutPolicy
from altar_layout.projection import (
    Viewport,
    hit_plane_contains,
    pick,
    to_screen,
    to_world,
)
from altar_layout.solver import (
    LayoutParams,
    Vec3,
    catalyst_slots,
    column_slots,
    echo_slots,
    solve,
)

__all__ = [
    "DEFAULT_POLICY",
    "LayoutParams",
    "LayoutPolicy",
    "Vec3",
    "Viewport",
    "catalyst_slots",
    "column_slots",
    "echo_slots",
    "hit_plane_contains",
    "pick",
    "solve",
    "to_screen",
    "to_world",
]
