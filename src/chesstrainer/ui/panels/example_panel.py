"""ExamplePanel — board, status line and actions for one mistake example."""

from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import (
    QFrame,
    QGridLayout,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from chesstrainer.core.enums import Color, GameStatus
from chesstrainer.i18n import t
from chesstrainer.review.controller import ReviewController
from chesstrainer.review.state import ReviewAction, ReviewState
from chesstrainer.ui.board.board_view import ReviewBoardView
from chesstrainer.ui.dialogs.settings_dialog import AppSettings
from chesstrainer.ui.styles.theme import board_theme


class ExamplePanel(QFrame):
    """Renders a :class:`ReviewController` and forwards user input to it.

    All chess decisions stay in the controller; the panel only re-reads its
    state after every change.
    """

    def __init__(self, controller: ReviewController, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setObjectName("examplePanel")
        self._controller = controller
        self._setup_ui()
        self.retranslate_ui()

        controller.events.on_changed.append(self._on_state_changed)
        self._refresh()

    @property
    def controller(self) -> ReviewController:
        return self._controller

    @property
    def board_view(self) -> ReviewBoardView:
        return self._board_view

    # ── UI setup ─────────────────────────────────────────────────────────

    def _setup_ui(self) -> None:
        example = self._controller.example
        root = QVBoxLayout(self)
        root.setContentsMargins(12, 12, 12, 12)
        root.setSpacing(8)

        self._header = QLabel()
        self._header.setStyleSheet("color: #94a3b8; font-weight: bold;")
        root.addWidget(self._header)

        # Error box (shown instead of the board when the example is unusable)
        self._error_box = QFrame()
        self._error_box.setObjectName("exampleError")
        err_layout = QVBoxLayout(self._error_box)
        self._error_title = QLabel()
        self._error_title.setStyleSheet("color: #fca5a5; font-weight: bold;")
        self._error_text = QLabel()
        self._error_text.setWordWrap(True)
        self._error_text.setStyleSheet("color: #fca5a5;")
        err_layout.addWidget(self._error_title)
        err_layout.addWidget(self._error_text)
        root.addWidget(self._error_box)

        # Review body
        self._body = QWidget()
        body = QHBoxLayout(self._body)
        body.setContentsMargins(0, 0, 0, 0)
        body.setSpacing(16)

        left = QVBoxLayout()
        self._status_label = QLabel()
        self._status_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._status_label.setStyleSheet("color: #94a3b8;")
        left.addWidget(self._status_label)

        self._board_view = ReviewBoardView()
        self._board_view.board_scene.set_flipped(example.player_color is Color.BLACK)
        self._board_view.square_clicked.connect(self._controller.click_square)
        left.addWidget(self._board_view, stretch=1)
        body.addLayout(left, stretch=1)

        right = QVBoxLayout()
        right.addStretch()
        self._analysis_title = QLabel()
        self._analysis_title.setStyleSheet("color: #fbbf24; font-weight: bold;")
        right.addWidget(self._analysis_title)

        self._explanation = QLabel(example.explanation)
        self._explanation.setWordWrap(True)
        self._explanation.setStyleSheet("color: #cbd5e1;")
        right.addWidget(self._explanation)

        grid = QGridLayout()
        grid.setSpacing(6)
        self._buttons: dict[ReviewAction, QPushButton] = {}
        for idx, (action, name, slot) in enumerate(
            (
                (ReviewAction.SHOW_MISTAKE, "btnMistake", self._controller.show_mistake),
                (ReviewAction.SHOW_BETTER_MOVE, "btnBetter", self._controller.show_better_move),
                (ReviewAction.RESET, "btnReset", self._controller.reset),
                (ReviewAction.PLAY_FROM_HERE, "btnPlay", self._controller.enable_interactive),
            )
        ):
            btn = QPushButton()
            btn.setObjectName(name)
            btn.setMinimumHeight(34)
            btn.clicked.connect(lambda _checked=False, fn=slot: fn())
            grid.addWidget(btn, idx // 2, idx % 2)
            self._buttons[action] = btn
        right.addLayout(grid)
        right.addStretch()
        body.addLayout(right, stretch=1)

        root.addWidget(self._body)

    def retranslate_ui(self) -> None:
        s = t()
        example = self._controller.example
        header = example.game_description
        if example.move_number is not None:
            number = s.example_move_number.format(number=example.move_number)
            header = f"{header} · {number}" if header else number
        self._header.setText(header)
        self._error_title.setText(s.error_title)
        self._analysis_title.setText(s.example_analysis)
        self._buttons[ReviewAction.SHOW_MISTAKE].setText(
            s.btn_show_mistake.format(move=example.move_notation)
        )
        self._buttons[ReviewAction.SHOW_BETTER_MOVE].setText(
            s.btn_show_better.format(move=example.suggested_move)
        )
        self._buttons[ReviewAction.RESET].setText(s.btn_reset)
        self._buttons[ReviewAction.PLAY_FROM_HERE].setText(s.btn_play)

    def apply_settings(self, settings: AppSettings) -> None:
        scene = self._board_view.board_scene
        scene.set_theme(board_theme(settings.board_theme))
        scene.set_show_coordinates(settings.show_coordinates)
        scene.set_show_legal_moves(settings.show_legal_moves)

    # ── State sync ───────────────────────────────────────────────────────

    def _on_state_changed(self, _state: ReviewState) -> None:
        self._refresh()

    def _refresh(self) -> None:
        ctrl = self._controller
        state = ctrl.state

        self._error_box.setVisible(state.is_error)
        self._body.setVisible(not state.is_error)
        if state.is_error:
            self._error_text.setText(state.error_text or "")
            return

        self._status_label.setText(state.status_text)
        available = ctrl.available_actions()
        for action, btn in self._buttons.items():
            btn.setEnabled(action in available)

        scene = self._board_view.board_scene
        scene.set_interactive(state.interactive)
        scene.set_state(
            state.current_position,
            last_move=state.last_move,
            selected=state.selected_square,
            destinations=state.selected_destinations,
            check_square=self._check_square(),
        )

    def _check_square(self) -> int | None:
        position = self._controller.current_position
        if position is None:
            return None
        if self._controller.game_status() not in (GameStatus.CHECK, GameStatus.CHECKMATE):
            return None
        return position.king_square(position.side_to_move)
