"""PuzzleSession - one mounted puzzle wired into the scene machine."""
from __future__ import annotations

import logging

from altar_layout import LayoutParams
from altar_match import DEFAULT_CONFIG, DropResult, MatchConfig, MatchEngine, PuzzleSpec

from altar_scene.machine import SceneMachine
from altar_scene.signals import (
    ESSENCE_COLLECTED,
    PUZZLE_COMPLETE,
    TOKEN_MATCHED,
    TOKEN_RETURNED,
    SignalBus,
)
from altar_scene.timing import Countdown

logger = logging.getLogger(__name__)

# 2 s at 20 TPS between the completion banner and the essence landing in the inventory
COLLECT_DELAY_TICKS = 40


class PuzzleSession:
    """Forwards pointer events to a MatchEngine and reports completion.

    Completion is read from the engine on every drop rather than stored
    alongside it. The first time every token is matched the session
    publishes ``puzzle_complete`` and, ``collect_delay`` ticks later, records
    the essence on the machine.
    """

    def __init__(
        self,
        puzzle: PuzzleSpec,
        machine: SceneMachine,
        bus: SignalBus,
        layout: LayoutParams,
        config: MatchConfig = DEFAULT_CONFIG,
        collect_delay: int = COLLECT_DELAY_TICKS,
        essence_id: int | None = None,
    ) -> None:
        if collect_delay < 0:
            raise ValueError(f"collect_delay must be >= 0, got {collect_delay}")
        self._engine = MatchEngine(puzzle, layout, config)
        self._machine = machine
        self._bus = bus
        self._essence_id = puzzle.essence_id if essence_id is None else essence_id
        self._collect_delay = collect_delay
        self._countdown: Countdown | None = None
        self._completed = False
        self._collected = False

    @property
    def engine(self) -> MatchEngine:
        return self._engine

    @property
    def puzzle(self) -> PuzzleSpec:
        return self._engine.puzzle

    @property
    def essence_id(self) -> int:
        return self._essence_id

    @property
    def completed(self) -> bool:
        return self._completed

    @property
    def collected(self) -> bool:
        return self._collected

    @property
    def status(self) -> str:
        return self.puzzle.complete_status if self._engine.all_matched else ""

    # -- Host events --

    def pointer_down(self, token_id: int) -> None:
        self._engine.begin_drag(token_id)

    def pointer_move(self, x: float, y: float) -> None:
        self._engine.update_drag(x, y)

    def pointer_up(self) -> DropResult | None:
        result = self._engine.end_drag()
        if result is None:
            return None
        name = TOKEN_MATCHED if result.matched else TOKEN_RETURNED
        self._bus.publish(name, token_id=result.token_id, distance=result.distance)
        if result.matched and not self._completed and self._engine.all_matched:
            self._complete()
        return result

    def resize(self, layout: LayoutParams) -> None:
        self._engine.on_layout_changed(layout)

    def tick(self) -> None:
        if self._countdown is not None and self._countdown.tick():
            self._countdown = None
            self._collect()

    def leave(self) -> None:
        """Return to the altar.

        A finished puzzle is collected before leaving; an unfinished one gives
        its essence back so the altar shows nothing in progress.
        """
        if self._completed and not self._collected:
            self._countdown = None
            self._collect()
        self._machine.return_to_altar()

    def _complete(self) -> None:
        self._completed = True
        logger.info("Puzzle %r complete", self.puzzle.key)
        self._bus.publish(
            PUZZLE_COMPLETE, essence_id=self._essence_id, puzzle=self.puzzle.key
        )
        if self._collect_delay == 0:
            self._collect()
        else:
            self._countdown = Countdown("collect_essence", self._collect_delay)

    def _collect(self) -> None:
        self._collected = True
        self._machine.collect_essence(self._essence_id)
        self._bus.publish(ESSENCE_COLLECTED, essence_id=self._essence_id)
