"""Tests for ReviewController — the per-example state machine."""

from collections.abc import Callable

import pytest

from chesstrainer.core.enums import Color
from chesstrainer.core.move import Move, parse_square
from chesstrainer.core.position import STARTING_FEN, Position
from chesstrainer.i18n import set_language, t
from chesstrainer.review.controller import ReviewController
from chesstrainer.review.models import MistakeExample
from chesstrainer.review.state import ClickOutcome, ReviewAction, ReviewState, ReviewView

AFTER_E4 = "rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR b KQkq - 0 1"

ExampleFactory = Callable[..., MistakeExample]


@pytest.fixture
def make_example(example_data: Callable[..., dict[str, object]]) -> ExampleFactory:
    def _make(**overrides: object) -> MistakeExample:
        return MistakeExample.from_dict(example_data(**overrides))

    return _make


@pytest.fixture
def ctrl(make_example: ExampleFactory) -> ReviewController:
    return ReviewController(make_example())


class TestInitial:
    def test_view_and_status(self, ctrl: ReviewController) -> None:
        assert ctrl.view == ReviewView.INITIAL
        assert ctrl.status_text == "Board is ready."
        assert ctrl.current_position == Position(STARTING_FEN)
        assert not ctrl.is_error

    def test_board_locked(self, ctrl: ReviewController) -> None:
        assert not ctrl.state.interactive
        assert ctrl.click_square(parse_square("e2")) == ClickOutcome.IGNORED
        assert not ctrl.attempt_move(Move.from_squares("e2", "e4"))
        assert ctrl.current_position == Position(STARTING_FEN)

    def test_all_actions_offered(self, ctrl: ReviewController) -> None:
        assert ctrl.available_actions() == frozenset(ReviewAction)


class TestShowMistake:
    def test_e4_scenario(self, ctrl: ReviewController) -> None:
        assert ctrl.show_mistake()
        pos = ctrl.current_position
        assert pos is not None
        assert pos.piece_at(parse_square("e4")) is not None
        assert pos.piece_at(parse_square("e2")) is None
        assert pos.side_to_move == Color.BLACK
        assert ctrl.state.last_move == Move.from_squares("e2", "e4")
        assert ctrl.view == ReviewView.MISTAKE_SHOWN
        assert ctrl.status_text == "This is the move you played: e4."

    def test_locks_board(self, ctrl: ReviewController) -> None:
        ctrl.enable_interactive()
        ctrl.show_mistake()
        assert not ctrl.state.interactive

    def test_lenient_mode_trusts_after_position(self, make_example: ExampleFactory) -> None:
        # d4 was not the move that leads to the given after-position.
        example = make_example(moveNotation="d4")
        ctrl = ReviewController(example, strict=False)
        assert not ctrl.is_error
        ctrl.show_mistake()
        assert ctrl.current_position == Position(AFTER_E4)
        assert ctrl.state.last_move == Move.from_squares("d2", "d4")

    def test_lenient_mode_unparseable_notation(self, make_example: ExampleFactory) -> None:
        ctrl = ReviewController(make_example(moveNotation="Zz9"), strict=False)
        assert ctrl.show_mistake()
        assert ctrl.current_position == Position(AFTER_E4)
        assert ctrl.state.last_move is None


class TestShowBetterMove:
    def test_suggestion_applied_to_before_position(self, ctrl: ReviewController) -> None:
        ctrl.show_mistake()
        assert ctrl.show_better_move()
        pos = ctrl.current_position
        assert pos is not None
        assert pos.piece_at(parse_square("d4")) is not None
        assert pos.piece_at(parse_square("e4")) is None
        assert ctrl.state.last_move == Move.from_squares("d2", "d4")
        assert ctrl.view == ReviewView.BETTER_MOVE_SHOWN
        assert ctrl.status_text == "A better move was d4."

    def test_illegal_suggestion(self, make_example: ExampleFactory) -> None:
        ctrl = ReviewController(make_example(suggestedMove="Qxh7"))
        before = ctrl.current_position
        view = ctrl.view

        assert not ctrl.show_better_move()

        assert ctrl.current_position == before
        assert ctrl.view == view
        assert "illegal move" in ctrl.status_text
        assert "Qxh7" in ctrl.status_text
        assert not ctrl.is_error


class TestReset:
    def test_round_trip_after_mistake(self, ctrl: ReviewController) -> None:
        ctrl.show_mistake()
        assert ctrl.reset()
        assert ctrl.current_position == Position(STARTING_FEN)
        assert ctrl.state.last_move is None
        assert ctrl.view == ReviewView.RESET
        assert ctrl.status_text == "Board has been reset."

    def test_idempotent(self, ctrl: ReviewController) -> None:
        ctrl.show_better_move()
        ctrl.reset()
        once = (ctrl.current_position, ctrl.view, ctrl.status_text, ctrl.state.last_move)
        ctrl.reset()
        twice = (ctrl.current_position, ctrl.view, ctrl.status_text, ctrl.state.last_move)
        assert once == twice

    def test_after_interactive_play(self, ctrl: ReviewController) -> None:
        ctrl.enable_interactive()
        ctrl.attempt_move(("e2", "e4"))
        ctrl.reset()
        assert ctrl.current_position == Position(STARTING_FEN)
        assert not ctrl.state.interactive


class TestInteractive:
    def test_enable(self, ctrl: ReviewController) -> None:
        assert ctrl.enable_interactive()
        assert ctrl.state.interactive
        assert ctrl.view == ReviewView.INTERACTIVE
        assert ctrl.status_text == "Board is unlocked. Play out the position!"

    def test_play_then_move_onto_own_piece(self, ctrl: ReviewController) -> None:
        ctrl.enable_interactive()
        assert ctrl.attempt_move(Move.from_squares("e2", "e4"))
        assert ctrl.status_text == "You played e4."
        after_e4 = ctrl.current_position
        assert after_e4 is not None and after_e4.side_to_move == Color.BLACK

        assert not ctrl.attempt_move(Move.from_squares("d8", "d7"))
        assert ctrl.current_position == after_e4
        assert ctrl.status_text == "That's an illegal move."

    def test_continues_from_shown_position(self, ctrl: ReviewController) -> None:
        ctrl.show_mistake()
        ctrl.enable_interactive()
        assert ctrl.attempt_move("e5")
        assert ctrl.state.last_move == Move.from_squares("e7", "e5")

    def test_mate_suffix(self, make_example: ExampleFactory) -> None:
        before = "rnbqkbnr/pppp1ppp/8/4p3/6P1/5P2/PPPPP2P/RNBQKBNR b KQkq - 0 2"
        after = "rnbqkbnr/pppp1ppp/8/8/4p1P1/5P2/PPPPP2P/RNBQKBNR w KQkq - 0 3"
        ctrl = ReviewController(
            make_example(
                fenBeforeMove=before, fenAfterMove=after, moveNotation="e4", suggestedMove="Qh4#"
            )
        )
        assert not ctrl.is_error
        ctrl.enable_interactive()
        assert ctrl.attempt_move("Qh4")
        assert ctrl.status_text == "You played Qh4#. Checkmate!"

    def test_check_suffix_with_insufficient_material(self, make_example: ExampleFactory) -> None:
        ctrl = ReviewController(
            make_example(
                fenBeforeMove="8/8/8/7k/8/8/8/K4B2 w - - 0 1",
                fenAfterMove="8/8/8/7k/8/8/8/1K3B2 b - - 1 1",
                moveNotation="Kb1",
                suggestedMove="Be2",
            )
        )
        assert not ctrl.is_error
        ctrl.enable_interactive()
        assert ctrl.attempt_move("Be2")
        assert ctrl.status_text == "You played Be2+. Check!"


class TestClickToMove:
    def test_select_then_move(self, ctrl: ReviewController) -> None:
        ctrl.enable_interactive()
        assert ctrl.click_square(parse_square("g1")) == ClickOutcome.SELECTED
        assert ctrl.state.selected_square == parse_square("g1")
        assert ctrl.state.selected_destinations == {parse_square("f3"), parse_square("h3")}

        assert ctrl.click_square(parse_square("f3")) == ClickOutcome.MOVED
        assert ctrl.state.selected_square is None
        assert ctrl.state.selected_destinations == frozenset()
        assert ctrl.status_text == "You played Nf3."

    def test_selection_cleared_after_illegal_second_click(
        self, ctrl: ReviewController
    ) -> None:
        ctrl.enable_interactive()
        ctrl.click_square(parse_square("e2"))
        assert ctrl.click_square(parse_square("e5")) == ClickOutcome.REJECTED
        assert ctrl.state.selected_square is None
        assert ctrl.current_position == Position(STARTING_FEN)

    def test_second_click_on_own_piece_does_not_reselect(
        self, ctrl: ReviewController
    ) -> None:
        ctrl.enable_interactive()
        ctrl.click_square(parse_square("e2"))
        assert ctrl.click_square(parse_square("d2")) == ClickOutcome.REJECTED
        assert ctrl.state.selected_square is None

    @pytest.mark.parametrize("square", ["e4", "e7"])
    def test_empty_or_opponent_square_not_selected(
        self, ctrl: ReviewController, square: str
    ) -> None:
        ctrl.enable_interactive()
        assert ctrl.click_square(parse_square(square)) == ClickOutcome.IGNORED
        assert ctrl.state.selected_square is None

    def test_pawn_promotion_by_click_is_queen(self, make_example: ExampleFactory) -> None:
        fen = "2k5/P7/8/8/8/8/8/K7 w - - 0 1"
        ctrl = ReviewController(
            make_example(
                fenBeforeMove=fen,
                fenAfterMove="Q1k5/8/8/8/8/8/8/K7 b - - 0 1",
                moveNotation="a8=Q+",
                suggestedMove="Kb2",
            )
        )
        assert not ctrl.is_error
        ctrl.enable_interactive()
        ctrl.click_square(parse_square("a7"))
        assert ctrl.click_square(parse_square("a8")) == ClickOutcome.MOVED
        pos = ctrl.current_position
        assert pos is not None
        assert str(pos.piece_at(parse_square("a8"))) == "Q"

    def test_selection_cleared_by_transitions(self, ctrl: ReviewController) -> None:
        ctrl.enable_interactive()
        ctrl.click_square(parse_square("e2"))
        ctrl.show_mistake()
        assert ctrl.state.selected_square is None
        assert ctrl.state.selected_destinations == frozenset()


class TestErrors:
    def test_invalid_after_position(self, make_example: ExampleFactory) -> None:
        ctrl = ReviewController(make_example(fenAfterMove="this is not a fen"))
        assert ctrl.is_error
        assert ctrl.view == ReviewView.ERROR
        assert ctrl.state.error_text == t().error_invalid_after
        assert ctrl.available_actions() == frozenset()
        assert not ctrl.show_mistake()
        assert not ctrl.show_better_move()
        assert not ctrl.enable_interactive()
        assert not ctrl.attempt_move(("e2", "e4"))

    def test_invalid_before_position(self, make_example: ExampleFactory) -> None:
        ctrl = ReviewController(make_example(fenBeforeMove="8/8/8/8/8/8/8/8 w - - 0 1"))
        assert ctrl.is_error
        assert ctrl.state.error_text == t().error_invalid_before
        assert ctrl.current_position is None
        assert not ctrl.reset()

    def test_inconsistent_example_rejected_when_strict(
        self, make_example: ExampleFactory
    ) -> None:
        ctrl = ReviewController(make_example(moveNotation="d4"))
        assert ctrl.is_error
        assert "d4" in (ctrl.state.error_text or "")

    def test_same_square_mistake_move_is_an_error(self, make_example: ExampleFactory) -> None:
        ctrl = ReviewController(make_example(moveNotation="e2e2"))
        assert ctrl.is_error
        assert "e2e2" in (ctrl.state.error_text or "")

    def test_same_square_suggestion(self, make_example: ExampleFactory) -> None:
        ctrl = ReviewController(make_example(suggestedMove="e2e2"))
        assert not ctrl.show_better_move()
        assert "illegal move" in ctrl.status_text
        assert ctrl.current_position == Position(STARTING_FEN)

    def test_same_square_attempt(self, ctrl: ReviewController) -> None:
        ctrl.enable_interactive()
        assert not ctrl.attempt_move("e2e2")
        assert not ctrl.attempt_move(("e2", "e2"))
        assert ctrl.status_text == "That's an illegal move."
        assert ctrl.current_position == Position(STARTING_FEN)

    def test_counters_are_not_compared(self, make_example: ExampleFactory) -> None:
        ctrl = ReviewController(
            make_example(fenAfterMove="rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR b KQkq e3 7 9")
        )
        assert not ctrl.is_error

    def test_error_text_follows_language(self, make_example: ExampleFactory) -> None:
        set_language("Russian")
        ctrl = ReviewController(make_example(fenAfterMove=""))
        assert ctrl.state.error_text == t().error_invalid_after
        assert ctrl.state.error_text != "Error: AI provided an invalid FEN for the resulting position."


class TestEvents:
    def test_callbacks_receive_state(self, ctrl: ReviewController) -> None:
        seen: list[ReviewView] = []

        def _on_changed(state: ReviewState) -> None:
            seen.append(state.view)

        ctrl.events.on_changed.append(_on_changed)
        ctrl.show_mistake()
        ctrl.show_better_move()
        ctrl.reset()
        ctrl.enable_interactive()
        assert seen == [
            ReviewView.MISTAKE_SHOWN,
            ReviewView.BETTER_MOVE_SHOWN,
            ReviewView.RESET,
            ReviewView.INTERACTIVE,
        ]

    def test_ignored_click_does_not_notify(self, ctrl: ReviewController) -> None:
        calls: list[ReviewState] = []
        ctrl.events.on_changed.append(calls.append)
        ctrl.click_square(parse_square("e4"))
        assert calls == []
