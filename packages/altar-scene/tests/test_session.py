"""Tests for PuzzleSession wiring between MatchEngine and SceneMachine."""
from __future__ import annotations

import pytest
from altar_layout import solve
from altar_match import COMMUNICATION
from altar_scene import (
    ESSENCE_COLLECTED,
    PUZZLE_COMPLETE,
    TOKEN_MATCHED,
    TOKEN_RETURNED,
    PuzzleSession,
    Scene,
    SceneMachine,
    SignalBus,
)


@pytest.fixture
def machine() -> SceneMachine:
    machine = SceneMachine(Scene.GAME)
    machine.start_puzzle(COMMUNICATION.essence_id)
    machine.go_to_puzzle()
    return machine


@pytest.fixture
def bus() -> SignalBus:
    return SignalBus()


@pytest.fixture
def received(bus: SignalBus) -> list:
    log: list = []
    for name in (TOKEN_MATCHED, TOKEN_RETURNED, PUZZLE_COMPLETE, ESSENCE_COLLECTED):
        bus.subscribe(name, lambda n, d: log.append((n, d)))
    return log


def _session(machine, bus, delay=3) -> PuzzleSession:
    return PuzzleSession(
        COMMUNICATION, machine, bus, solve(1920, 1080), collect_delay=delay
    )


def _drop_on_target(session: PuzzleSession, token_id: int) -> None:
    target = session.engine.target(token_id)
    session.pointer_down(token_id)
    session.pointer_move(target.position[0], target.position[1])
    session.pointer_up()


def _solve(session: PuzzleSession) -> None:
    for token_id in (0, 1, 2):
        _drop_on_target(session, token_id)


class TestPointerForwarding:
    def test_move_and_drop(self, machine, bus, received) -> None:
        session = _session(machine, bus)
        session.pointer_down(1)
        session.pointer_move(0.2, 0.3)
        assert session.engine.token(1).position == (0.2, 0.3, 0.1)

        result = session.pointer_up()
        assert result is not None and result.matched is False
        bus.flush()
        assert received[0][0] == TOKEN_RETURNED
        assert received[0][1]["token_id"] == 1

    def test_pointer_up_without_drag(self, machine, bus, received) -> None:
        session = _session(machine, bus)
        assert session.pointer_up() is None
        bus.flush()
        assert received == []

    def test_matched_signal(self, machine, bus, received) -> None:
        session = _session(machine, bus)
        _drop_on_target(session, 2)
        bus.flush()
        assert received == [(TOKEN_MATCHED, {"token_id": 2, "distance": 0.0})]

    def test_resize(self, machine, bus) -> None:
        session = _session(machine, bus)
        _drop_on_target(session, 0)
        phone = solve(375, 667)
        session.resize(phone)
        assert session.engine.layout == phone
        assert session.engine.token(0).position == (0.0, phone.y_top, 0.0)


class TestStatus:
    def test_empty_until_complete(self, machine, bus) -> None:
        session = _session(machine, bus)
        _drop_on_target(session, 0)
        _drop_on_target(session, 1)
        assert session.status == ""
        _drop_on_target(session, 2)
        assert session.status == "SYNCHRONIZATION COMPLETE: ESSENCE ACQUIRED"


class TestCompletion:
    def test_publishes_once(self, machine, bus, received) -> None:
        session = _session(machine, bus)
        _solve(session)
        # further pointer traffic on a finished board changes nothing
        session.pointer_down(0)
        session.pointer_up()
        bus.flush()
        complete = [d for n, d in received if n == PUZZLE_COMPLETE]
        assert complete == [{"essence_id": 0, "puzzle": "communication"}]
        assert session.completed

    def test_collects_after_delay(self, machine, bus, received) -> None:
        session = _session(machine, bus, delay=3)
        _solve(session)
        assert not machine.is_collected(0)

        session.tick()
        session.tick()
        assert not machine.is_collected(0)
        session.tick()
        assert machine.is_collected(0)
        assert machine.active_essence is None
        assert session.collected

        session.tick()
        bus.flush()
        assert [n for n, _ in received].count(ESSENCE_COLLECTED) == 1

    def test_zero_delay_collects_immediately(self, machine, bus) -> None:
        session = _session(machine, bus, delay=0)
        _solve(session)
        assert machine.is_collected(0)
        assert machine.active_essence is None

    def test_collection_keeps_scene(self, machine, bus) -> None:
        session = _session(machine, bus, delay=0)
        _solve(session)
        assert machine.scene is Scene.PUZZLE_ORACLE

    def test_tick_before_completion_is_harmless(self, machine, bus) -> None:
        session = _session(machine, bus, delay=1)
        for _ in range(5):
            session.tick()
        assert not machine.is_collected(0)

    def test_negative_delay_raises(self, machine, bus) -> None:
        with pytest.raises(ValueError, match="collect_delay must be >= 0"):
            _session(machine, bus, delay=-1)

    def test_essence_override(self, machine, bus) -> None:
        session = PuzzleSession(
            COMMUNICATION, machine, bus, solve(1920, 1080),
            collect_delay=0, essence_id=7,
        )
        _solve(session)
        assert machine.collected_essences == frozenset({7})
        assert machine.active_essence == COMMUNICATION.essence_id


class TestLeave:
    def test_leave_unfinished(self, machine, bus) -> None:
        session = _session(machine, bus)
        session.leave()
        assert machine.scene is Scene.GAME
        assert not machine.is_collected(0)
        assert machine.active_essence is None

    def test_leave_unfinished_then_restart(self, machine, bus) -> None:
        _session(machine, bus).leave()
        machine.start_puzzle(0)
        machine.go_to_puzzle()
        session = _session(machine, bus)
        assert machine.active_essence == 0
        assert session.engine.matched_count == 0

    def test_leave_during_collect_delay_collects(self, machine, bus, received) -> None:
        session = _session(machine, bus, delay=10)
        _solve(session)
        session.leave()
        assert machine.scene is Scene.GAME
        assert machine.is_collected(0)
        for _ in range(20):
            session.tick()
        bus.flush()
        assert [n for n, _ in received].count(ESSENCE_COLLECTED) == 1
