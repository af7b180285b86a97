"""Review state record and its view / action enumerations."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum, auto

from chesstrainer.core.move import Move, Square
from chesstrainer.core.position import Position


class ReviewView(IntEnum):
    """Finite-state-machine states of one reviewed example."""

    INITIAL = auto()
    MISTAKE_SHOWN = auto()
    BETTER_MOVE_SHOWN = auto()
    INTERACTIVE = auto()
    RESET = auto()  # same board as INITIAL, different status text
    ERROR = auto()  # upstream data unusable; no interaction offered


class ReviewAction(IntEnum):
    """User-facing actions of an example."""

    SHOW_MISTAKE = auto()
    SHOW_BETTER_MOVE = auto()
    RESET = auto()
    PLAY_FROM_HERE = auto()


class ClickOutcome(IntEnum):
    """What a board click did."""

    IGNORED = auto()
    SELECTED = auto()
    MOVED = auto()
    REJECTED = auto()


@dataclass(slots=True)
class ReviewState:
    """Mutable state shared by all views of one example."""

    current_position: Position | None
    status_text: str
    view: ReviewView = ReviewView.INITIAL
    selected_square: Square | None = None
    selected_destinations: frozenset[Square] = field(default_factory=frozenset)
    last_move: Move | None = None
    interactive: bool = False
    error_text: str | None = None

    @property
    def is_error(self) -> bool:
        return self.view == ReviewView.ERROR

    def clear_selection(self) -> None:
        self.selected_square = None
        self.selected_destinations = frozenset()
