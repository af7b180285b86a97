"""ThemeCard — one recurring theme with its example panels."""

from __future__ import annotations

from PyQt6.QtWidgets import QFrame, QLabel, QVBoxLayout, QWidget

from chesstrainer.i18n import t
from chesstrainer.review.controller import ReviewController
from chesstrainer.review.models import RecurringTheme
from chesstrainer.ui.dialogs.settings_dialog import AppSettings
from chesstrainer.ui.panels.example_panel import ExamplePanel


class ThemeCard(QFrame):
    """Title, description and an :class:`ExamplePanel` per example."""

    def __init__(
        self,
        theme: RecurringTheme,
        controllers: list[ReviewController],
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.setObjectName("themeCard")
        self._theme = theme

        layout = QVBoxLayout(self)
        layout.setContentsMargins(16, 16, 16, 16)
        layout.setSpacing(10)

        self._title = QLabel()
        self._title.setStyleSheet("color: #38bdf8; font-size: 20px; font-weight: bold;")
        layout.addWidget(self._title)

        self._description = QLabel(theme.description)
        self._description.setWordWrap(True)
        self._description.setStyleSheet("color: #cbd5e1;")
        layout.addWidget(self._description)

        self._examples_header = QLabel()
        self._examples_header.setStyleSheet("font-size: 15px; font-weight: bold;")
        layout.addWidget(self._examples_header)

        self._panels = [ExamplePanel(ctrl) for ctrl in controllers]
        for panel in self._panels:
            layout.addWidget(panel)

        self.retranslate_ui()

    @property
    def panels(self) -> list[ExamplePanel]:
        return list(self._panels)

    def retranslate_ui(self) -> None:
        s = t()
        self._title.setText(s.theme_title.format(title=self._theme.title))
        self._examples_header.setText(s.theme_examples)
        for panel in self._panels:
            panel.retranslate_ui()

    def apply_settings(self, settings: AppSettings) -> None:
        for panel in self._panels:
            panel.apply_settings(settings)
