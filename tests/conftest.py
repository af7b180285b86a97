"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import os
import sys
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest

# Linux CI runners are often headless. Force an offscreen backend only there.
if (
    sys.platform.startswith("linux")
    and "QT_QPA_PLATFORM" not in os.environ
    and "DISPLAY" not in os.environ
    and "WAYLAND_DISPLAY" not in os.environ
):
    os.environ["QT_QPA_PLATFORM"] = "offscreen"

START_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"
AFTER_E4_FEN = "rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR b KQkq - 0 1"


def _is_ui_test(request: pytest.FixtureRequest) -> bool:
    return "ui" in Path(str(request.node.fspath)).parts


def _example_dict(**overrides: object) -> dict[str, object]:
    """Raw report example: 1. e4 played, 1. d4 suggested."""
    data: dict[str, object] = {
        "gameDescription": "Game 1 vs. Opponent",
        "moveNumber": 1,
        "moveNotation": "e4",
        "fenBeforeMove": START_FEN,
        "fenAfterMove": AFTER_E4_FEN,
        "suggestedMove": "d4",
        "explanation": "Both are fine, but this is a test.",
    }
    data.update(overrides)
    return data


def _report_dict(*examples: dict[str, object]) -> dict[str, object]:
    return {
        "playerName": "Magnus",
        "overallSummary": "Solid openings, shaky endgames.",
        "recurringThemes": [
            {
                "title": "Opening choices",
                "description": "Central pawn moves.",
                "examples": list(examples) or [_example_dict()],
            }
        ],
    }


@pytest.fixture(scope="session")
def qapp() -> Iterator[object]:
    """Provide a singleton QApplication for UI tests."""
    from PyQt6.QtWidgets import QApplication

    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    yield app


@pytest.fixture(autouse=True)
def _reset_language() -> Iterator[None]:
    """Reset shared i18n state between tests."""
    from chesstrainer.i18n import set_language

    set_language("English")
    yield
    set_language("English")


@pytest.fixture(autouse=True)
def _cleanup_qt_widgets(
    request: pytest.FixtureRequest,
) -> Iterator[None]:
    """Ensure UI tests do not leak top-level widgets into the next test."""
    if not _is_ui_test(request):
        yield
        return

    app = request.getfixturevalue("qapp")
    yield

    for widget in list(app.topLevelWidgets()):
        widget.close()
    app.processEvents()


@pytest.fixture
def example_data() -> Callable[..., dict[str, object]]:
    """Factory for raw example mappings; keyword arguments override fields."""
    return _example_dict


@pytest.fixture
def report_data() -> Callable[..., dict[str, object]]:
    """Factory for raw report mappings built from raw examples."""
    return _report_dict
