"""Exception taxonomy shared by the engine, the review layer and the UI."""

from __future__ import annotations


class TrainerError(Exception):
    """Base class for all domain errors."""


class InvalidPositionError(TrainerError):
    """Position text is malformed or structurally inconsistent."""

    def __init__(self, text: str, reason: str) -> None:
        super().__init__(f"Invalid position {text!r}: {reason}")
        self.text = text
        self.reason = reason


class IllegalMoveError(TrainerError):
    """A move (or notation) is not legal from the given position."""

    def __init__(self, move: object, fen: str, reason: str = "illegal move") -> None:
        super().__init__(f"{reason}: {move} in {fen}")
        self.move = move
        self.fen = fen
        self.reason = reason


class UpstreamDataError(TrainerError):
    """The analysis report contradicts itself (e.g. before/after positions)."""


class ReportFormatError(UpstreamDataError):
    """The analysis report is not valid JSON or misses required fields."""
