"""Briefing sequencer: one line at a time, then into the puzzle."""
from __future__ import annotations

from typing import Callable, Sequence

# 2.5 s per line at 20 TPS
BRIEFING_HOLD_TICKS = 50


class Briefing:
    """Holds each line for ``hold_ticks`` ticks.

    After the last line's hold, ``on_finished`` fires exactly once. An empty
    briefing still waits one hold before finishing.
    """

    def __init__(
        self,
        lines: Sequence[str],
        on_finished: Callable[[], None],
        hold_ticks: int = BRIEFING_HOLD_TICKS,
    ) -> None:
        if hold_ticks <= 0:
            raise ValueError(f"hold_ticks must be > 0, got {hold_ticks}")
        self._lines = tuple(lines)
        self._on_finished = on_finished
        self._hold = hold_ticks
        self._index = 0
        self._elapsed = 0
        self._finished = False

    @property
    def index(self) -> int:
        return self._index

    @property
    def current_line(self) -> str | None:
        if not self._lines:
            return None
        return self._lines[self._index]

    @property
    def finished(self) -> bool:
        return self._finished

    @property
    def progress(self) -> float:
        """Fraction of the current line's hold that has elapsed (0..1)."""
        return self._elapsed / self._hold

    def tick(self) -> None:
        if self._finished:
            return
        self._elapsed += 1
        if self._elapsed < self._hold:
            return
        self._elapsed = 0
        if self._index < len(self._lines) - 1:
            self._index += 1
        else:
            self._finished = True
            self._on_finished()
