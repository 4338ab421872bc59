"""SceneMachine - the global game-state register."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable

from altar_scene.scenes import Scene

logger = logging.getLogger(__name__)

TransitionCallback = Callable[[Scene, Scene], None]

# Scenes in which an active essence is in progress
_PUZZLE_SCENES = frozenset({Scene.PUZZLE_BRIEFING, Scene.PUZZLE_ORACLE})


@dataclass(frozen=True, slots=True)
class SceneSnapshot:
    """Read-only view handed to the scene router."""

    scene: Scene
    collected_essences: frozenset[int]
    active_essence: int | None
    artifacts: tuple[str, ...]


class SceneMachine:
    """Current scene plus the essence inventory.

    Transitions are permissive: every one is accepted from every state and
    overwrites the current scene. Nothing here validates ordering. The active
    essence only survives inside the briefing and puzzle scenes; any other
    destination clears it.
    """

    def __init__(self, initial: Scene | str = Scene.SPLASH) -> None:
        self._scene = Scene(initial)
        self._collected: set[int] = set()
        self._active: int | None = None
        self._artifacts: list[str] = []
        self._listeners: list[TransitionCallback] = []

    @property
    def scene(self) -> Scene:
        return self._scene

    @property
    def collected_essences(self) -> frozenset[int]:
        return frozenset(self._collected)

    @property
    def active_essence(self) -> int | None:
        return self._active

    @property
    def artifacts(self) -> tuple[str, ...]:
        return tuple(self._artifacts)

    def snapshot(self) -> SceneSnapshot:
        return SceneSnapshot(
            scene=self._scene,
            collected_essences=frozenset(self._collected),
            active_essence=self._active,
            artifacts=tuple(self._artifacts),
        )

    def on_transition(self, callback: TransitionCallback) -> None:
        """Register ``callback(old, new)``, called after every scene change."""
        self._listeners.append(callback)

    def off_transition(self, callback: TransitionCallback) -> None:
        try:
            self._listeners.remove(callback)
        except ValueError:
            pass

    # -- Transitions --

    def go_to(self, scene: Scene | str) -> None:
        """Force the current scene. Raises ValueError for unknown scene names."""
        new = Scene(scene)
        old = self._scene
        self._scene = new
        if new not in _PUZZLE_SCENES and self._active is not None:
            logger.debug("Essence %d abandoned on leaving for %s", self._active, new.value)
            self._active = None
        logger.info("Scene %s -> %s", old.value, new.value)
        for cb in list(self._listeners):
            cb(old, new)

    def show_intro(self) -> None:
        self.go_to(Scene.INTRO)

    def start_game(self) -> None:
        self.go_to(Scene.GAME)

    def go_to_briefing(self) -> None:
        self.go_to(Scene.PUZZLE_BRIEFING)

    def go_to_puzzle(self) -> None:
        self.go_to(Scene.PUZZLE_ORACLE)

    def return_to_altar(self) -> None:
        self.go_to(Scene.GAME)

    def start_puzzle(self, essence_id: int) -> None:
        """Mark the essence active and open its briefing in one step."""
        self._active = essence_id
        self.go_to(Scene.PUZZLE_BRIEFING)

    # -- Inventory --

    def collect_essence(self, essence_id: int) -> None:
        """Record an essence. Idempotent; clears the active essence only if it matches."""
        if essence_id not in self._collected:
            self._collected.add(essence_id)
            logger.info("Essence %d collected", essence_id)
        if self._active == essence_id:
            self._active = None

    def is_collected(self, essence_id: int) -> bool:
        return essence_id in self._collected

    def collect_artifact(self, name: str) -> None:
        if name not in self._artifacts:
            self._artifacts.append(name)
            logger.info("Artifact %r collected", name)
