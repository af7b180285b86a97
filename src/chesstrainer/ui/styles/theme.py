"""Board colour schemes and the application style sheet."""

from __future__ import annotations

from dataclasses import dataclass

from PyQt6.QtGui import QColor

# Overlay colours shared by every board; taken from the web trainer.
_LAST_MOVE = QColor(250, 204, 21, 128)  # yellow-400 / 50%
_SELECTED = QColor(34, 197, 94, 128)  # green-500 / 50%
_CHECK = QColor(239, 68, 68, 140)


@dataclass(frozen=True)
class BoardTheme:
    """Square, overlay and coordinate colours of one board style."""

    light_square: QColor
    dark_square: QColor
    highlight_from: QColor  # selected piece
    highlight_to: QColor  # destination dots
    highlight_check: QColor
    last_move: QColor
    coord_light: QColor  # drawn on dark squares
    coord_dark: QColor  # drawn on light squares

    @classmethod
    def from_squares(cls, light: str, dark: str) -> BoardTheme:
        """Theme with the standard overlays; coordinates use the opposite square colour."""
        return cls(
            light_square=QColor(light),
            dark_square=QColor(dark),
            highlight_from=_SELECTED,
            highlight_to=_SELECTED,
            highlight_check=_CHECK,
            last_move=_LAST_MOVE,
            coord_light=QColor(dark),
            coord_dark=QColor(light),
        )

    @classmethod
    def default(cls) -> BoardTheme:
        return cls.from_squares("#f0d9b5", "#b58863")


BOARD_THEMES: dict[str, BoardTheme] = {
    "Classic": BoardTheme.default(),
    "Blue": BoardTheme.from_squares("#dbe4ee", "#6f8fae"),
    "Green": BoardTheme.from_squares("#eef1dc", "#6b9a6f"),
}


def board_theme(name: str) -> BoardTheme:
    """Theme by settings name; unknown names give the classic board."""
    return BOARD_THEMES.get(name, BOARD_THEMES["Classic"])


# ── Application style sheet ──────────────────────────────────────────────────
APP_STYLE = """
QMainWindow, QScrollArea, QScrollArea > QWidget > QWidget {
    background: #0f172a;
}

QLabel {
    color: #e2e8f0;
    font-family: "Inter", "Segoe UI", sans-serif;
}

QFrame#themeCard {
    background: #1e293b;
    border: 1px solid #334155;
    border-radius: 8px;
}

QFrame#examplePanel {
    background: #1e293b;
    border: 1px solid #334155;
    border-radius: 6px;
}

QFrame#exampleError {
    background: #450a0a;
    border: 1px solid #b91c1c;
    border-radius: 6px;
}

QPushButton {
    background: #475569;
    color: #e2e8f0;
    border: none;
    border-radius: 4px;
    padding: 6px 12px;
    font-size: 13px;
}
QPushButton:hover {
    background: #64748b;
}
QPushButton:disabled {
    color: #64748b;
    background: #1e293b;
}
QPushButton#btnMistake { background: #7f1d1d; }
QPushButton#btnMistake:hover { background: #991b1b; }
QPushButton#btnBetter { background: #14532d; }
QPushButton#btnBetter:hover { background: #166534; }
QPushButton#btnPlay { background: #0284c7; }
QPushButton#btnPlay:hover { background: #0ea5e9; }

QMenuBar {
    background: #0f172a;
    color: #e2e8f0;
}
QMenuBar::item:selected {
    background: #1e293b;
}
QMenu {
    background: #1e293b;
    color: #e2e8f0;
    border: 1px solid #334155;
}
QMenu::item:selected {
    background: #0369a1;
}
"""
