"""Puzzle definitions and the built-in catalog."""
from __future__ import annotations

from dataclasses import dataclass

from altar_match.types import PuzzleDefinitionError, TokenId


@dataclass(frozen=True, slots=True)
class PieceSpec:
    id: TokenId
    label: str
    color: str


@dataclass(frozen=True, slots=True)
class PuzzleSpec:
    """Everything needed to mount one puzzle instance.

    ``catalysts`` and ``echoes`` are listed in column order, left to right.
    Labels across a column are deliberately mismatched: the pairing is by
    ``id`` only, and finding it is the puzzle.
    """

    key: str
    essence_id: int
    title: str
    subtitle: str
    catalysts: tuple[PieceSpec, ...]
    echoes: tuple[PieceSpec, ...]
    briefing: tuple[str, ...] = ()
    complete_status: str = "SYNCHRONIZATION COMPLETE: ESSENCE ACQUIRED"
    essence_color: str = "#8829E7"

    def __post_init__(self) -> None:
        for kind, pieces in (("catalyst", self.catalysts), ("echo", self.echoes)):
            seen: set[int] = set()
            for piece in pieces:
                if piece.id in seen:
                    raise PuzzleDefinitionError(
                        f"Puzzle {self.key!r} has duplicate {kind} id {piece.id}"
                    )
                seen.add(piece.id)


COMMUNICATION = PuzzleSpec(
    key="communication",
    essence_id=0,
    title="Constellation I: The Interface Core",
    subtitle="Match the solution to the user challenge.",
    catalysts=(
        PieceSpec(0, "Intuitive UI", "#FF00FF"),
        PieceSpec(1, "Clear Communication", "#9400D3"),
        PieceSpec(2, "Accessible Design", "#00FFFF"),
    ),
    echoes=(
        PieceSpec(2, "Complex User Needs", "#00FFFF"),
        PieceSpec(0, "User Frustration", "#FF00FF"),
        PieceSpec(1, "Ambiguous Feedback", "#9400D3"),
    ),
    briefing=(
        "The first essence flickers. Its signal is fractured.",
        "Below drift three catalysts, each a solution.",
        "Above hang three echoes, each a user's struggle.",
        "Bind every solution to the struggle it answers.",
    ),
)

PUZZLES: dict[str, PuzzleSpec] = {
    COMMUNICATION.key: COMMUNICATION,
}


def get_puzzle(key: str) -> PuzzleSpec:
    """Look up a catalog puzzle. Raises KeyError for unknown keys."""
    try:
        return PUZZLES[key]
    except KeyError:
        raise KeyError(f"No puzzle registered as {key!r}") from None


def puzzle_for_essence(essence_id: int) -> PuzzleSpec | None:
    """Puzzle guarding the given altar essence, or None if it has none."""
    for puzzle in PUZZLES.values():
        if puzzle.essence_id == essence_id:
            return puzzle
    return None
