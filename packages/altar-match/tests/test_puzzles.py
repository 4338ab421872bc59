"""Tests for puzzle definitions and the catalog."""
from __future__ import annotations

import pytest
from altar_match import (
    COMMUNICATION,
    PUZZLES,
    PieceSpec,
    PuzzleDefinitionError,
    PuzzleSpec,
    get_puzzle,
    puzzle_for_essence,
)


def _puzzle(catalysts, echoes) -> PuzzleSpec:
    return PuzzleSpec(
        key="test",
        essence_id=1,
        title="Test",
        subtitle="Sub",
        catalysts=catalysts,
        echoes=echoes,
    )


class TestPuzzleSpec:
    def test_duplicate_catalyst_id_raises(self) -> None:
        with pytest.raises(PuzzleDefinitionError, match="duplicate catalyst id 0"):
            _puzzle(
                (PieceSpec(0, "a", "#fff"), PieceSpec(0, "b", "#fff")),
                (PieceSpec(0, "x", "#fff"),),
            )

    def test_duplicate_echo_id_raises(self) -> None:
        with pytest.raises(PuzzleDefinitionError, match="duplicate echo id 3"):
            _puzzle(
                (PieceSpec(3, "a", "#fff"),),
                (PieceSpec(3, "x", "#fff"), PieceSpec(3, "y", "#fff")),
            )

    def test_definition_error_is_value_error(self) -> None:
        assert issubclass(PuzzleDefinitionError, ValueError)

    def test_defaults(self) -> None:
        puzzle = _puzzle((PieceSpec(0, "a", "#fff"),), (PieceSpec(0, "x", "#fff"),))
        assert puzzle.briefing == ()
        assert puzzle.complete_status == "SYNCHRONIZATION COMPLETE: ESSENCE ACQUIRED"


class TestCommunicationPuzzle:
    def test_ids_pair_up(self) -> None:
        assert {p.id for p in COMMUNICATION.catalysts} == {p.id for p in COMMUNICATION.echoes}

    def test_columns_are_mismatched(self) -> None:
        """No catalyst sits directly below its own echo."""
        for catalyst, echo in zip(COMMUNICATION.catalysts, COMMUNICATION.echoes):
            assert catalyst.id != echo.id

    def test_pairs_share_color(self) -> None:
        echoes = {p.id: p for p in COMMUNICATION.echoes}
        for catalyst in COMMUNICATION.catalysts:
            assert echoes[catalyst.id].color == catalyst.color

    def test_has_briefing(self) -> None:
        assert len(COMMUNICATION.briefing) >= 1
        assert COMMUNICATION.title == "Constellation I: The Interface Core"


class TestCatalog:
    def test_get_known(self) -> None:
        assert get_puzzle("communication") is COMMUNICATION
        assert PUZZLES["communication"] is COMMUNICATION

    def test_get_unknown_raises(self) -> None:
        with pytest.raises(KeyError, match="nope"):
            get_puzzle("nope")

    def test_for_essence(self) -> None:
        assert puzzle_for_essence(0) is COMMUNICATION
        assert puzzle_for_essence(99) is None
