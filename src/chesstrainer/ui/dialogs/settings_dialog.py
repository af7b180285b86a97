"""SettingsDialog — language, board appearance and example validation."""

from __future__ import annotations

from dataclasses import dataclass

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import (
    QCheckBox,
    QComboBox,
    QDialog,
    QDialogButtonBox,
    QFormLayout,
    QLabel,
    QVBoxLayout,
    QWidget,
)

from chesstrainer.i18n import LANGUAGES, t
from chesstrainer.ui.styles.theme import BOARD_THEMES


@dataclass
class AppSettings:
    """User preferences shared by the main window and every board."""

    language: str = "English"
    board_theme: str = "Classic"
    show_coordinates: bool = True
    show_legal_moves: bool = True
    strict_validation: bool = True  # replay each mistake against its after-position


def _select(combo: QComboBox, text: str) -> None:
    """Select *text*, or the first entry when it is not offered."""
    combo.setCurrentIndex(max(0, combo.findText(text)))


class SettingsDialog(QDialog):
    """Edits an :class:`AppSettings` in place when accepted."""

    def __init__(self, settings: AppSettings, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setModal(True)
        self.setMinimumWidth(420)
        self.setWindowFlags(
            self.windowFlags() & ~Qt.WindowType.WindowContextHelpButtonHint
        )
        self._settings = settings
        self._build_ui()
        self.retranslate_ui()

    def _build_ui(self) -> None:
        s = self._settings
        layout = QVBoxLayout(self)
        form = QFormLayout()
        form.setContentsMargins(16, 16, 16, 8)
        form.setSpacing(10)

        self._lang_label = QLabel()
        self._lang_combo = QComboBox()
        self._lang_combo.addItems(LANGUAGES)
        _select(self._lang_combo, s.language)
        form.addRow(self._lang_label, self._lang_combo)

        self._theme_label = QLabel()
        self._theme_combo = QComboBox()
        self._theme_combo.addItems(list(BOARD_THEMES))
        _select(self._theme_combo, s.board_theme)
        form.addRow(self._theme_label, self._theme_combo)

        self._coords_check = QCheckBox(checked=s.show_coordinates)
        self._legal_check = QCheckBox(checked=s.show_legal_moves)
        self._strict_check = QCheckBox(checked=s.strict_validation)
        for check in (self._coords_check, self._legal_check, self._strict_check):
            form.addRow(check)
        layout.addLayout(form)

        buttons = QDialogButtonBox(
            QDialogButtonBox.StandardButton.Ok | QDialogButtonBox.StandardButton.Cancel
        )
        buttons.accepted.connect(self._on_accept)
        buttons.rejected.connect(self.reject)
        layout.addWidget(buttons)

    def retranslate_ui(self) -> None:
        s = t()
        self.setWindowTitle(s.settings_title)
        self._lang_label.setText(s.settings_language)
        self._theme_label.setText(s.settings_board_theme)
        self._coords_check.setText(s.settings_show_coords)
        self._legal_check.setText(s.settings_show_legal)
        self._strict_check.setText(s.settings_strict)

    def apply(self, settings: AppSettings) -> None:
        """Copy the widget values into *settings*."""
        settings.language = self._lang_combo.currentText()
        settings.board_theme = self._theme_combo.currentText()
        settings.show_coordinates = self._coords_check.isChecked()
        settings.show_legal_moves = self._legal_check.isChecked()
        settings.strict_validation = self._strict_check.isChecked()

    def _on_accept(self) -> None:
        self.apply(self._settings)
        self.accept()
