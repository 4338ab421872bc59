"""Tests for Countdown, Briefing, and tick conversion."""
from __future__ import annotations

import pytest
from altar_scene import BRIEFING_HOLD_TICKS, Briefing, Countdown, seconds_to_ticks


class TestSecondsToTicks:
    def test_conversions(self) -> None:
        assert seconds_to_ticks(2.5, 20) == 50
        assert seconds_to_ticks(0.7, 20) == 14
        assert seconds_to_ticks(0.0, 20) == 1

    def test_bad_tps(self) -> None:
        with pytest.raises(ValueError, match="tps must be positive"):
            seconds_to_ticks(1.0, 0)

    def test_default_hold_is_two_and_a_half_seconds(self) -> None:
        assert BRIEFING_HOLD_TICKS == seconds_to_ticks(2.5, 20)


class TestCountdown:
    def test_fires_on_last_tick(self) -> None:
        cd = Countdown(name="splash", remaining=3)
        assert cd.tick() is False
        assert cd.tick() is False
        assert cd.tick() is True
        assert cd.expired

    def test_fires_once(self) -> None:
        cd = Countdown(name="once", remaining=1)
        assert cd.tick() is True
        assert cd.tick() is False
        assert cd.remaining == 0

    @pytest.mark.parametrize("remaining", [0, -4])
    def test_non_positive_raises(self, remaining: int) -> None:
        with pytest.raises(ValueError, match="remaining must be > 0"):
            Countdown(name="bad", remaining=remaining)


class TestBriefing:
    def test_lines_advance_per_hold(self) -> None:
        finished = []
        briefing = Briefing(["a", "b", "c"], lambda: finished.append(True), hold_ticks=2)

        assert briefing.current_line == "a"
        briefing.tick()
        assert briefing.current_line == "a"
        assert briefing.progress == 0.5
        briefing.tick()
        assert briefing.current_line == "b"
        briefing.tick()
        briefing.tick()
        assert briefing.current_line == "c"
        assert finished == []

    def test_finishes_after_last_hold_exactly_once(self) -> None:
        finished = []
        briefing = Briefing(["a", "b"], lambda: finished.append(True), hold_ticks=3)
        for _ in range(6):
            briefing.tick()
        assert finished == [True]
        assert briefing.finished
        assert briefing.current_line == "b"
        for _ in range(10):
            briefing.tick()
        assert finished == [True]

    def test_not_finished_one_tick_early(self) -> None:
        finished = []
        briefing = Briefing(["a", "b"], lambda: finished.append(True), hold_ticks=3)
        for _ in range(5):
            briefing.tick()
        assert finished == []
        assert not briefing.finished

    def test_empty_briefing_waits_one_hold(self) -> None:
        finished = []
        briefing = Briefing([], lambda: finished.append(True), hold_ticks=4)
        assert briefing.current_line is None
        for _ in range(3):
            briefing.tick()
        assert finished == []
        briefing.tick()
        assert finished == [True]

    def test_bad_hold_raises(self) -> None:
        with pytest.raises(ValueError, match="hold_ticks must be > 0"):
            Briefing(["a"], lambda: None, hold_ticks=0)
