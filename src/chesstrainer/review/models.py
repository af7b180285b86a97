"""Data models of the analysis report consumed by the review layer.

Every field comes from a language model and is untrusted.  Parsing only checks
the JSON shape; chess validity is decided later by the position engine, one
example at a time.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from chesstrainer.core.enums import Color
from chesstrainer.core.errors import ReportFormatError


def _text(data: Mapping[str, Any], key: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    if not isinstance(value, str):
        raise ReportFormatError(f"Field {key!r} must be a string, got {type(value).__name__}")
    return value.strip()


def _move_number(value: Any) -> int | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value if value > 0 else None
    if isinstance(value, str):
        digits = value.strip().rstrip(".")
        if digits.isdigit() and int(digits) > 0:
            return int(digits)
    return None


def _player_color(value: Any, fen_before: str) -> Color:
    """Explicit ``playerColor`` wins; otherwise the side to move before the mistake."""
    if isinstance(value, str):
        try:
            return Color.from_letter(value)
        except ValueError:
            pass
    fields = fen_before.split()
    if len(fields) > 1 and fields[1] == "b":
        return Color.BLACK
    return Color.WHITE


def _mapping(value: Any, what: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ReportFormatError(f"{what} must be an object, got {type(value).__name__}")
    return value


def _list(value: Any, what: str) -> list[Any]:
    if value is None:
        return []
    if not isinstance(value, list):
        raise ReportFormatError(f"{what} must be a list, got {type(value).__name__}")
    return value


@dataclass(frozen=True, slots=True)
class MistakeExample:
    """One flagged mistake: positions around it, the move, and a suggestion."""

    game_description: str
    move_notation: str
    fen_before_move: str
    fen_after_move: str
    suggested_move: str
    explanation: str
    player_color: Color = Color.WHITE
    move_number: int | None = None

    @classmethod
    def from_dict(cls, data: Any) -> MistakeExample:
        data = _mapping(data, "Example")
        fen_before = _text(data, "fenBeforeMove")
        return cls(
            game_description=_text(data, "gameDescription"),
            move_notation=_text(data, "moveNotation"),
            fen_before_move=fen_before,
            fen_after_move=_text(data, "fenAfterMove"),
            suggested_move=_text(data, "suggestedMove"),
            explanation=_text(data, "explanation"),
            player_color=_player_color(data.get("playerColor"), fen_before),
            move_number=_move_number(data.get("moveNumber")),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "gameDescription": self.game_description,
            "moveNumber": self.move_number,
            "moveNotation": self.move_notation,
            "fenBeforeMove": self.fen_before_move,
            "fenAfterMove": self.fen_after_move,
            "suggestedMove": self.suggested_move,
            "explanation": self.explanation,
            "playerColor": "w" if self.player_color is Color.WHITE else "b",
        }


@dataclass(frozen=True, slots=True)
class RecurringTheme:
    """A weakness that shows up across several games."""

    title: str
    description: str
    examples: tuple[MistakeExample, ...]

    @classmethod
    def from_dict(cls, data: Any) -> RecurringTheme:
        data = _mapping(data, "Theme")
        examples = _list(data.get("examples"), "Theme examples")
        return cls(
            title=_text(data, "title"),
            description=_text(data, "description"),
            examples=tuple(MistakeExample.from_dict(ex) for ex in examples),
        )


@dataclass(frozen=True, slots=True)
class MultiGameAnalysisReport:
    """The analysis supplier's answer for a batch of games."""

    player_name: str
    overall_summary: str
    recurring_themes: tuple[RecurringTheme, ...]

    @classmethod
    def from_dict(cls, data: Any) -> MultiGameAnalysisReport:
        data = _mapping(data, "Report")
        if "recurringThemes" not in data:
            raise ReportFormatError("Report has no 'recurringThemes' field")
        themes = _list(data.get("recurringThemes"), "recurringThemes")
        return cls(
            player_name=_text(data, "playerName"),
            overall_summary=_text(data, "overallSummary"),
            recurring_themes=tuple(RecurringTheme.from_dict(th) for th in themes),
        )

    @property
    def example_count(self) -> int:
        return sum(len(theme.examples) for theme in self.recurring_themes)
