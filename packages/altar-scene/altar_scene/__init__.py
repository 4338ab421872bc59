"""altar-scene - Scene state machine, signals, and puzzle sessions."""
from __future__ import annotations

from altar_scene.briefing import BRIEFING_HOLD_TICKS, Briefing
from altar_scene.machine import SceneMachine, SceneSnapshot
from altar_scene.scenes import Scene
from altar_scene.session import COLLECT_DELAY_TICKS, PuzzleSession
from altar_scene.signals import (
    ESSENCE_COLLECTED,
    PUZZLE_COMPLETE,
    SCENE_CHANGED,
    TOKEN_MATCHED,
    TOKEN_RETURNED,
    SignalBus,
    bridge_transitions,
)
from altar_scene.timing import Countdown, seconds_to_ticks

__all__ = [
    "BRIEFING_HOLD_TICKS",
    "Briefing",
    "COLLECT_DELAY_TICKS",
    "Countdown",
    "ESSENCE_COLLECTED",
    "PUZZLE_COMPLETE",
    "PuzzleSession",
    "SCENE_CHANGED",
    "Scene",
    "SceneMachine",
    "SceneSnapshot",
    "SignalBus",
    "TOKEN_MATCHED",
    "TOKEN_RETURNED",
    "bridge_transitions",
    "seconds_to_ticks",
]
