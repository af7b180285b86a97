"""ReviewController — the state machine behind one reviewed mistake.

Views: INITIAL → {MISTAKE_SHOWN, BETTER_MOVE_SHOWN, INTERACTIVE, RESET} in any
order, or ERROR when the example's positions are unusable.  Every transition
runs synchronously and resolves to a status string; engine errors never
escape to the caller.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from chesstrainer.core.engine import Notation, PositionEngine
from chesstrainer.core.enums import GameStatus, PieceKind
from chesstrainer.core.errors import (
    IllegalMoveError,
    InvalidPositionError,
    UpstreamDataError,
)
from chesstrainer.core.move import Move, Square
from chesstrainer.core.position import Position
from chesstrainer.i18n import t
from chesstrainer.review.models import MistakeExample
from chesstrainer.review.state import (
    ClickOutcome,
    ReviewAction,
    ReviewState,
    ReviewView,
)

_LOGGER = logging.getLogger(__name__)

StateCallback = Callable[[ReviewState], None]


@dataclass
class ReviewEvents:
    """Listeners called after every state change."""

    on_changed: list[StateCallback] = field(default_factory=list)


def status_suffix(status: GameStatus) -> str:
    s = t()
    return {
        GameStatus.CHECKMATE: s.status_checkmate,
        GameStatus.CHECK: s.status_check,
        GameStatus.STALEMATE: s.status_stalemate,
        GameStatus.DRAW: s.status_draw,
    }.get(status, "")


class ReviewController:
    """Drives a :class:`PositionEngine` for one :class:`MistakeExample`.

    With ``strict=True`` (default) the example is rejected up front when its
    after-move position does not follow from replaying the mistake.  With
    ``strict=False`` the after-move position is trusted as given and the replay
    is only used to highlight the move.
    """

    __slots__ = (
        "_example",
        "_engine",
        "_strict",
        "_state",
        "_before",
        "_after",
        "_mistake_move",
        "events",
        "__weakref__",
    )

    def __init__(
        self,
        example: MistakeExample,
        engine: PositionEngine | None = None,
        *,
        strict: bool = True,
    ) -> None:
        self._example = example
        self._engine = engine or PositionEngine()
        self._strict = strict
        self._before: Position | None = None
        self._after: Position | None = None
        self._mistake_move: Move | None = None
        self._state = ReviewState(current_position=None, status_text="")
        self.events = ReviewEvents()
        self._validate_example()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def example(self) -> MistakeExample:
        return self._example

    @property
    def engine(self) -> PositionEngine:
        return self._engine

    @property
    def state(self) -> ReviewState:
        return self._state

    @property
    def view(self) -> ReviewView:
        return self._state.view

    @property
    def status_text(self) -> str:
        return self._state.status_text

    @property
    def is_error(self) -> bool:
        return self._state.is_error

    @property
    def current_position(self) -> Position | None:
        return self._state.current_position

    def available_actions(self) -> frozenset[ReviewAction]:
        """Actions the host may offer; none in ERROR."""
        if self._state.is_error:
            return frozenset()
        return frozenset(ReviewAction)

    def legal_destinations(self, square: Square) -> frozenset[Square]:
        position = self._state.current_position
        if position is None:
            return frozenset()
        return self._engine.legal_destinations(position, square)

    def game_status(self) -> GameStatus:
        position = self._state.current_position
        if position is None:
            return GameStatus.ONGOING
        return self._engine.status(position)

    # ── Transitions ──────────────────────────────────────────────────────

    def show_mistake(self) -> bool:
        """Show the position after the move actually played."""
        if self._state.is_error:
            return False
        if self._after is None:
            self._state.status_text = t().error_invalid_after
            self._notify()
            return False
        self._set_board(self._after, self._mistake_move, ReviewView.MISTAKE_SHOWN)
        self._state.status_text = t().status_mistake_shown.format(
            move=self._example.move_notation
        )
        _LOGGER.debug("Showing mistake %s", self._example.move_notation)
        self._notify()
        return True

    def show_better_move(self) -> bool:
        """Apply the suggested move to the position before the mistake."""
        if self._state.is_error or self._before is None:
            return False
        suggestion = self._example.suggested_move
        try:
            played = self._engine.play(self._before, suggestion)
        except IllegalMoveError as exc:
            _LOGGER.warning("Suggested move rejected: %s", exc)
            self._state.status_text = t().status_illegal_suggestion.format(move=suggestion)
            self._notify()
            return False
        self._set_board(played.position, played.move, ReviewView.BETTER_MOVE_SHOWN)
        self._state.status_text = t().status_better_move.format(move=suggestion)
        self._notify()
        return True

    def reset(self) -> bool:
        """Return to the position before the mistake."""
        if self._state.is_error or self._before is None:
            return False
        self._set_board(self._before, None, ReviewView.RESET)
        self._state.status_text = t().status_reset
        self._notify()
        return True

    def enable_interactive(self) -> bool:
        """Unlock the board; play continues from whatever is shown."""
        if self._state.is_error:
            return False
        self._state.interactive = True
        self._state.view = ReviewView.INTERACTIVE
        self._state.clear_selection()
        self._state.status_text = t().status_unlocked
        self._notify()
        return True

    def attempt_move(self, move: Notation) -> bool:
        """Play *move* on the unlocked board. Ignored while locked."""
        position = self._state.current_position
        if not self._state.interactive or self._state.is_error or position is None:
            return False
        try:
            played = self._engine.play(position, move)
        except IllegalMoveError as exc:
            _LOGGER.debug("Rejected user move: %s", exc)
            self._state.status_text = t().status_illegal_move
            self._notify()
            return False

        self._state.current_position = played.position
        self._state.last_move = played.move
        text = t().status_you_played.format(san=played.san)
        suffix = status_suffix(self._engine.status(played.position))
        self._state.status_text = f"{text} {suffix}" if suffix else text
        self._notify()
        return True

    def click_square(self, square: Square) -> ClickOutcome:
        """Two-click move entry.

        The first click selects a piece of the side to move.  The second click
        always attempts a move from the selection (promotion to queen) and
        clears the selection, legal or not.
        """
        state = self._state
        position = state.current_position
        if not state.interactive or state.is_error or position is None:
            return ClickOutcome.IGNORED

        if state.selected_square is not None:
            origin = state.selected_square
            state.clear_selection()
            ok = self.attempt_move(Move(origin, square, PieceKind.QUEEN))
            return ClickOutcome.MOVED if ok else ClickOutcome.REJECTED

        piece = position.piece_at(square)
        if piece is None or piece.color != position.side_to_move:
            return ClickOutcome.IGNORED
        state.selected_square = square
        state.selected_destinations = self._engine.legal_destinations(position, square)
        self._notify()
        return ClickOutcome.SELECTED

    # ── Internal helpers ─────────────────────────────────────────────────

    def _validate_example(self) -> None:
        """Load both positions; any failure makes the example an error."""
        s = t()
        ex = self._example
        try:
            self._before = self._engine.load(ex.fen_before_move)
        except InvalidPositionError as exc:
            _LOGGER.warning("Invalid before-move position: %s", exc)
            self._enter_error(s.error_invalid_before)
            return

        self._state.current_position = self._before
        self._state.status_text = s.status_board_ready

        try:
            self._after = self._engine.load(ex.fen_after_move)
        except InvalidPositionError as exc:
            _LOGGER.warning("Invalid after-move position: %s", exc)
            self._enter_error(s.error_invalid_after)
            return

        try:
            self._mistake_move = self._replay_mistake(self._before)
            self._check_consistency(self._before, self._after)
        except UpstreamDataError as exc:
            if self._strict:
                _LOGGER.warning("Inconsistent example %r: %s", ex.game_description, exc)
                self._enter_error(s.error_inconsistent.format(move=ex.move_notation))
                return
            _LOGGER.info("Ignoring inconsistent example %r: %s", ex.game_description, exc)

    def _replay_mistake(self, before: Position) -> Move:
        """Re-derive the mistake move from its notation.

        Raises:
            UpstreamDataError: the notation is not legal before the mistake.
        """
        try:
            return self._engine.resolve_notation(before, self._example.move_notation)
        except IllegalMoveError as exc:
            raise UpstreamDataError(
                f"mistake {self._example.move_notation!r} is not legal before the move"
            ) from exc

    def _check_consistency(self, before: Position, after: Position) -> None:
        """Raise :class:`UpstreamDataError` unless the mistake leads to *after*.

        Only placement and side to move are compared; counters and en-passant
        fields from the report are not trusted.
        """
        if self._mistake_move is None:
            return
        reached = self._engine.apply(before, self._mistake_move)
        if reached.placement != after.placement or reached.side_to_move != after.side_to_move:
            raise UpstreamDataError(
                f"{self._example.move_notation!r} leads to {reached.fen}, "
                f"report says {after.fen}"
            )

    def _enter_error(self, text: str) -> None:
        self._state.view = ReviewView.ERROR
        self._state.error_text = text
        self._state.status_text = text
        self._state.interactive = False
        self._state.clear_selection()

    def _set_board(self, position: Position, last_move: Move | None, view: ReviewView) -> None:
        self._state.current_position = position
        self._state.last_move = last_move
        self._state.interactive = False
        self._state.view = view
        self._state.clear_selection()

    def _notify(self) -> None:
        for cb in self.events.on_changed:
            cb(self._state)
