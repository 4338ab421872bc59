"""Queued in-process signal bus, flushed once per frame by the host."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Callable

if TYPE_CHECKING:
    from altar_scene.machine import SceneMachine
    from altar_scene.scenes import Scene

logger = logging.getLogger(__name__)

SCENE_CHANGED = "scene_changed"
TOKEN_MATCHED = "token_matched"
TOKEN_RETURNED = "token_returned"
PUZZLE_COMPLETE = "puzzle_complete"
ESSENCE_COLLECTED = "essence_collected"

Handler = Callable[[str, dict[str, Any]], None]


class SignalBus:
    """Publishing only queues; handlers run on ``flush()``.

    Signals published by a handler during a flush wait for the next flush,
    so one frame never cascades. Handler exceptions propagate.
    """

    def __init__(self) -> None:
        self._subscribers: dict[str, list[Handler]] = {}
        self._queue: list[tuple[str, dict[str, Any]]] = []

    def subscribe(self, signal_name: str, handler: Handler) -> None:
        self._subscribers.setdefault(signal_name, []).append(handler)

    def unsubscribe(self, signal_name: str, handler: Handler) -> None:
        handlers = self._subscribers.get(signal_name)
        if handlers and handler in handlers:
            handlers.remove(handler)

    def publish(self, signal_name: str, **data: Any) -> None:
        self._queue.append((signal_name, data))

    def pending(self) -> int:
        return len(self._queue)

    def flush(self) -> int:
        """Dispatch everything queued before this call. Returns the signal count."""
        batch, self._queue = self._queue, []
        for signal_name, data in batch:
            handlers = self._subscribers.get(signal_name)
            if not handlers:
                logger.debug("Signal %s had no subscribers", signal_name)
                continue
            for handler in list(handlers):
                handler(signal_name, data)
        return len(batch)

    def clear(self) -> None:
        self._queue.clear()


def bridge_transitions(machine: SceneMachine, bus: SignalBus) -> None:
    """Republish every scene change as a ``scene_changed`` signal."""

    def on_transition(old: Scene, new: Scene) -> None:
        bus.publish(SCENE_CHANGED, old=old, new=new)

    machine.on_transition(on_transition)
