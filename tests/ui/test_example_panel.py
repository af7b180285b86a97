"""Tests for ExamplePanel and ThemeCard wiring."""

from __future__ import annotations

from collections.abc import Callable

from chesstrainer.core.move import parse_square
from chesstrainer.i18n import set_language
from chesstrainer.review.controller import ReviewController
from chesstrainer.review.models import MistakeExample, RecurringTheme
from chesstrainer.review.state import ReviewAction
from chesstrainer.ui.dialogs.settings_dialog import AppSettings
from chesstrainer.ui.panels.example_panel import ExamplePanel
from chesstrainer.ui.panels.theme_card import ThemeCard

RawFactory = Callable[..., dict[str, object]]


def _panel(example_data: RawFactory, **overrides: object) -> ExamplePanel:
    example = MistakeExample.from_dict(example_data(**overrides))
    return ExamplePanel(ReviewController(example))


def test_buttons_drive_controller(example_data: RawFactory) -> None:
    panel = _panel(example_data)
    scene = panel.board_view.board_scene

    panel._buttons[ReviewAction.SHOW_MISTAKE].click()
    assert panel._status_label.text() == "This is the move you played: e4."
    assert len(scene._last_move_highlights) == 2

    panel._buttons[ReviewAction.RESET].click()
    assert panel._status_label.text() == "Board has been reset."
    assert scene._last_move_highlights == []


def test_button_labels_name_moves(example_data: RawFactory) -> None:
    panel = _panel(example_data)
    assert "e4" in panel._buttons[ReviewAction.SHOW_MISTAKE].text()
    assert "d4" in panel._buttons[ReviewAction.SHOW_BETTER_MOVE].text()


def test_play_from_here_unlocks_scene(example_data: RawFactory) -> None:
    panel = _panel(example_data)
    scene = panel.board_view.board_scene
    assert not scene.is_interactive()

    panel._buttons[ReviewAction.PLAY_FROM_HERE].click()
    assert scene.is_interactive()


def test_square_clicks_reach_controller(example_data: RawFactory) -> None:
    panel = _panel(example_data)
    panel.controller.enable_interactive()
    scene = panel.board_view.board_scene

    scene.square_clicked.emit(parse_square("e2"))
    assert len(scene._legal_dot_items) == 2

    scene.square_clicked.emit(parse_square("e4"))
    assert panel._status_label.text() == "You played e4."
    assert scene._legal_dot_items == []


def test_error_mode_hides_board(example_data: RawFactory) -> None:
    panel = _panel(example_data, fenAfterMove="broken")
    assert panel._body.isHidden()
    assert not panel._error_box.isHidden()
    assert "invalid FEN" in panel._error_text.text()


def test_black_examples_are_flipped(example_data: RawFactory) -> None:
    panel = _panel(example_data, playerColor="b")
    assert panel.board_view.board_scene.is_flipped()


def test_apply_settings_reaches_scene(example_data: RawFactory) -> None:
    panel = _panel(example_data)
    panel.apply_settings(AppSettings(show_coordinates=False))
    scene = panel.board_view.board_scene
    assert all(not item.isVisible() for item in scene._coord_items)


def test_retranslate(example_data: RawFactory) -> None:
    panel = _panel(example_data)
    set_language("Russian")
    panel.retranslate_ui()
    assert panel._buttons[ReviewAction.RESET].text() == "Сбросить доску"


def test_theme_card_builds_one_panel_per_controller(example_data: RawFactory) -> None:
    examples = tuple(MistakeExample.from_dict(example_data()) for _ in range(2))
    theme = RecurringTheme("Tactics", "Missed forks.", examples)
    card = ThemeCard(theme, [ReviewController(ex) for ex in examples])

    assert len(card.panels) == 2
    assert "Tactics" in card._title.text()
    assert card.panels[0].controller is not card.panels[1].controller
