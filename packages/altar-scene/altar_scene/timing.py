"""Tick-counted delays. The host advances them at a fixed tick rate."""
from __future__ import annotations

from dataclasses import dataclass


def seconds_to_ticks(seconds: float, tps: int) -> int:
    """Convert a duration to whole ticks, never less than one."""
    if tps <= 0:
        raise ValueError("tps must be positive")
    return max(1, round(seconds * tps))


@dataclass
class Countdown:
    """One-shot countdown. ``tick()`` returns True exactly once, on reaching 0."""

    name: str
    remaining: int

    def __post_init__(self) -> None:
        if self.remaining <= 0:
            raise ValueError(f"remaining must be > 0, got {self.remaining}")

    @property
    def expired(self) -> bool:
        return self.remaining <= 0

    def tick(self) -> bool:
        if self.remaining <= 0:
            return False
        self.remaining -= 1
        return self.remaining == 0
