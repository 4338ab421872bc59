"""MatchEngine - single-pointer drag tracking and proximity snapping."""
from __future__ import annotations

import logging
import math

from altar_layout import LayoutParams, Vec3, catalyst_slots, echo_slots

from altar_match.config import DEFAULT_CONFIG, MatchConfig
from altar_match.puzzles import PuzzleSpec
from altar_match.types import DropResult, Target, Token, TokenId

logger = logging.getLogger(__name__)


class MatchEngine:
    """Owns the tokens, targets and the one active drag of a mounted puzzle.

    Pointer events arrive already projected into layout space. Every
    operation tolerates out-of-order calls: a pointer-up with nothing
    dragged, or a pointer-down on a matched token, is ignored rather than
    raised, since the host's event ordering is not under our control.
    """

    def __init__(
        self,
        puzzle: PuzzleSpec,
        layout: LayoutParams,
        config: MatchConfig = DEFAULT_CONFIG,
    ) -> None:
        self._puzzle = puzzle
        self._config = config
        self._layout = layout
        self._dragged: TokenId | None = None
        self._initial: dict[TokenId, Vec3] = {}
        self._targets: dict[TokenId, Target] = {}
        self._derive(layout)
        self._tokens: dict[TokenId, Token] = {
            piece.id: Token(
                id=piece.id,
                position=self._initial[piece.id],
                label=piece.label,
                color=piece.color,
            )
            for piece in puzzle.catalysts
        }

    def _derive(self, layout: LayoutParams) -> None:
        slots = catalyst_slots(layout, len(self._puzzle.catalysts))
        self._initial = {
            piece.id: slot for piece, slot in zip(self._puzzle.catalysts, slots)
        }
        slots = echo_slots(layout, len(self._puzzle.echoes))
        self._targets = {
            piece.id: Target(
                id=piece.id, position=slot, label=piece.label, color=piece.color
            )
            for piece, slot in zip(self._puzzle.echoes, slots)
        }

    # -- Read-only views --

    @property
    def puzzle(self) -> PuzzleSpec:
        return self._puzzle

    @property
    def layout(self) -> LayoutParams:
        return self._layout

    @property
    def config(self) -> MatchConfig:
        return self._config

    @property
    def dragged_token_id(self) -> TokenId | None:
        return self._dragged

    @property
    def tokens(self) -> tuple[Token, ...]:
        return tuple(self._tokens.values())

    @property
    def targets(self) -> tuple[Target, ...]:
        return tuple(self._targets.values())

    def token(self, token_id: TokenId) -> Token | None:
        return self._tokens.get(token_id)

    def target(self, token_id: TokenId) -> Target | None:
        return self._targets.get(token_id)

    def initial_position(self, token_id: TokenId) -> Vec3 | None:
        """Canonical resting slot for a token under the current layout."""
        return self._initial.get(token_id)

    @property
    def snap_threshold(self) -> float:
        return max(
            self._config.min_snap_threshold,
            self._layout.spread_x * self._config.snap_ratio,
        )

    @property
    def matched_count(self) -> int:
        return sum(1 for t in self._tokens.values() if t.is_matched)

    @property
    def all_matched(self) -> bool:
        return all(t.is_matched for t in self._tokens.values())

    # -- Pointer events --

    def begin_drag(self, token_id: TokenId) -> None:
        """Start dragging a token. Last pointer-down wins."""
        token = self._tokens.get(token_id)
        if token is None or token.is_matched:
            logger.debug("Ignored drag start on token %r", token_id)
            return
        if self._dragged is not None and self._dragged != token_id:
            logger.debug("Drag of token %d superseded by %d", self._dragged, token_id)
        self._dragged = token_id

    def update_drag(self, x: float, y: float) -> None:
        """Move the dragged token to (x, y), lifted toward the viewer."""
        if self._dragged is None:
            return
        self._tokens[self._dragged].position = (x, y, self._config.drag_lift)

    def end_drag(self) -> DropResult | None:
        """Commit the drag: snap onto the token's target, or return it to its slot.

        Returns None when no drag was active.
        """
        if self._dragged is None:
            return None
        token_id = self._dragged
        self._dragged = None

        token = self._tokens[token_id]
        target = self._targets.get(token_id)
        threshold = self.snap_threshold
        if target is None:
            distance = math.inf
        else:
            distance = math.hypot(
                token.position[0] - target.position[0],
                token.position[1] - target.position[1],
            )

        matched = target is not None and distance < threshold
        if matched:
            token.position = target.position
            token.is_matched = True
            logger.debug(
                "Token %d matched (distance %.3f < %.3f)", token_id, distance, threshold
            )
        else:
            token.position = self._initial[token_id]
            logger.debug(
                "Token %d returned to slot (distance %.3f >= %.3f)",
                token_id, distance, threshold,
            )
        return DropResult(
            token_id=token_id, matched=matched, distance=distance, threshold=threshold
        )

    # -- Layout --

    def on_layout_changed(self, layout: LayoutParams) -> None:
        """Re-derive slots and targets. Matched tokens follow their target;
        everything else, including an uncommitted drag, goes back to its slot.
        """
        self._layout = layout
        self._derive(layout)
        for token in self._tokens.values():
            target = self._targets.get(token.id)
            if token.is_matched and target is not None:
                token.position = target.position
            else:
                token.position = self._initial[token.id]

    def reset(self) -> None:
        """Return every token to its slot, unmatched, and drop any drag."""
        self._dragged = None
        for token in self._tokens.values():
            token.position = self._initial[token.id]
            token.is_matched = False
