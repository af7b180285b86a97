"""MainWindow — report summary and the scrollable list of theme cards."""

from __future__ import annotations

import logging
from pathlib import Path

from PyQt6.QtGui import QAction, QIcon
from PyQt6.QtWidgets import (
    QFileDialog,
    QLabel,
    QMainWindow,
    QMessageBox,
    QScrollArea,
    QStatusBar,
    QVBoxLayout,
    QWidget,
)

from chesstrainer.core.enums import Color, PieceKind
from chesstrainer.core.errors import ReportFormatError
from chesstrainer.core.piece import Piece
from chesstrainer.i18n import set_language, t
from chesstrainer.review.models import MultiGameAnalysisReport
from chesstrainer.review.report import load_report
from chesstrainer.review.session import ReviewSession
from chesstrainer.ui.dialogs.settings_dialog import AppSettings, SettingsDialog
from chesstrainer.ui.panels.theme_card import ThemeCard
from chesstrainer.ui.resources import piece_pixmap

_LOGGER = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """Main application window."""

    def __init__(
        self,
        settings: AppSettings | None = None,
        session: ReviewSession | None = None,
    ) -> None:
        super().__init__()
        self.setMinimumSize(760, 560)
        self.resize(1100, 800)
        self.setWindowIcon(QIcon(piece_pixmap(Piece(Color.WHITE, PieceKind.KNIGHT), 64)))

        self._settings = settings or AppSettings()
        self._session = session or ReviewSession(strict=self._settings.strict_validation)
        self._cards: list[ThemeCard] = []

        set_language(self._settings.language)
        self._setup_ui()
        self._setup_menu()
        self.retranslate_ui()

    @property
    def session(self) -> ReviewSession:
        return self._session

    @property
    def cards(self) -> list[ThemeCard]:
        return list(self._cards)

    # ── UI setup ─────────────────────────────────────────────────────────

    def _setup_ui(self) -> None:
        self._scroll = QScrollArea()
        self._scroll.setWidgetResizable(True)
        self.setCentralWidget(self._scroll)

        content = QWidget()
        self._content_layout = QVBoxLayout(content)
        self._content_layout.setContentsMargins(16, 16, 16, 16)
        self._content_layout.setSpacing(16)

        self._placeholder = QLabel()
        self._placeholder.setStyleSheet("color: #94a3b8; font-size: 15px;")
        self._content_layout.addWidget(self._placeholder)

        self._summary_title = QLabel()
        self._summary_title.setStyleSheet("color: #38bdf8; font-size: 22px; font-weight: bold;")
        self._content_layout.addWidget(self._summary_title)

        self._summary_text = QLabel()
        self._summary_text.setWordWrap(True)
        self._content_layout.addWidget(self._summary_text)

        self._themes_header = QLabel()
        self._themes_header.setStyleSheet("font-size: 24px; font-weight: bold;")
        self._content_layout.addWidget(self._themes_header)

        self._cards_layout = QVBoxLayout()
        self._cards_layout.setSpacing(24)
        self._content_layout.addLayout(self._cards_layout)
        self._content_layout.addStretch()

        self._scroll.setWidget(content)

        self._status = QStatusBar()
        self.setStatusBar(self._status)
        self._status_label = QLabel()
        self._status.addWidget(self._status_label)

        self._set_report_visible(False)

    def _setup_menu(self) -> None:
        menu_bar = self.menuBar()
        assert menu_bar is not None

        self._menu_file = menu_bar.addMenu("")
        assert self._menu_file is not None
        self._act_open = QAction(self)
        self._act_open.setShortcut("Ctrl+O")
        self._act_open.triggered.connect(self._on_open_report)
        self._menu_file.addAction(self._act_open)
        self._menu_file.addSeparator()
        self._act_quit = QAction(self)
        self._act_quit.setShortcut("Ctrl+Q")
        self._act_quit.triggered.connect(self.close)
        self._menu_file.addAction(self._act_quit)

        self._menu_settings = menu_bar.addMenu("")
        assert self._menu_settings is not None
        self._act_settings = QAction(self)
        self._act_settings.setShortcut("Ctrl+,")
        self._act_settings.triggered.connect(self._on_settings)
        self._menu_settings.addAction(self._act_settings)

    def retranslate_ui(self) -> None:
        s = t()
        self.setWindowTitle(s.window_title)
        self._menu_file.setTitle(s.menu_file)
        self._act_open.setText(s.menu_open_report)
        self._act_quit.setText(s.menu_quit)
        self._menu_settings.setTitle(s.menu_settings)
        self._act_settings.setText(s.menu_settings_action)
        self._placeholder.setText(s.no_report)
        self._themes_header.setText(s.themes_header)
        report = self._session.report
        if report is not None:
            self._summary_title.setText(s.summary_title.format(player=report.player_name))
        else:
            self._status_label.setText(s.status_ready)
        for card in self._cards:
            card.retranslate_ui()

    # ── Report handling ──────────────────────────────────────────────────

    def load_report_file(self, file_path: Path | str) -> bool:
        """Load and show a report; errors are shown to the user, not raised."""
        path = Path(file_path)
        try:
            report = load_report(path)
        except (OSError, ReportFormatError) as exc:
            _LOGGER.warning("Could not load report %s: %s", path, exc)
            self._status_label.setText(t().status_report_failed.format(msg=exc))
            QMessageBox.warning(
                self, t().open_report_title, t().open_report_failed.format(exc=exc)
            )
            return False
        self.show_report(report)
        self._status_label.setText(t().status_loaded_report.format(name=path.name))
        return True

    def show_report(self, report: MultiGameAnalysisReport) -> None:
        """Replace the displayed report; old review states are discarded."""
        self._session.load(report)
        self._clear_cards()

        for ti, theme in enumerate(report.recurring_themes):
            controllers = [
                self._session.controller(ti, ei) for ei in range(len(theme.examples))
            ]
            card = ThemeCard(theme, controllers)
            card.apply_settings(self._settings)
            self._cards_layout.addWidget(card)
            self._cards.append(card)

        failed = self._session.failed_examples()
        if failed:
            _LOGGER.info("%d example(s) of the report are unusable", len(failed))

        self._summary_text.setText(report.overall_summary)
        self._set_report_visible(True)
        self.retranslate_ui()

    def _clear_cards(self) -> None:
        for card in self._cards:
            self._cards_layout.removeWidget(card)
            card.deleteLater()
        self._cards.clear()

    def _set_report_visible(self, visible: bool) -> None:
        self._placeholder.setVisible(not visible)
        self._summary_title.setVisible(visible)
        self._summary_text.setVisible(visible)
        self._themes_header.setVisible(visible)

    # ── Slots ────────────────────────────────────────────────────────────

    def _on_open_report(self) -> None:
        s = t()
        file_path, _ = QFileDialog.getOpenFileName(
            self, s.open_report_title, "", f"{s.report_filter};;{s.all_files}"
        )
        if file_path:
            self.load_report_file(file_path)

    def _on_settings(self) -> None:
        dlg = SettingsDialog(self._settings, self)
        if dlg.exec():
            self._apply_settings()

    def _apply_settings(self) -> None:
        # Locale before any retranslate_ui call.
        set_language(self._settings.language)
        report = self._session.report
        if self._session.strict != self._settings.strict_validation:
            self._session.set_strict(self._settings.strict_validation)
            if report is not None:
                self.show_report(report)
                return
        self.retranslate_ui()
        for card in self._cards:
            card.apply_settings(self._settings)
