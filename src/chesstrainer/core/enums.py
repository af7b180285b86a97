"""Core enumerations for the review domain."""

from __future__ import annotations

from enum import IntEnum, auto

import chess


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    @property
    def oracle_value(self) -> chess.Color:
        """The ``python-chess`` boolean for this side."""
        return chess.WHITE if self is Color.WHITE else chess.BLACK

    @classmethod
    def from_oracle(cls, value: chess.Color) -> Color:
        return cls.WHITE if value == chess.WHITE else cls.BLACK

    @classmethod
    def from_letter(cls, letter: str) -> Color:
        """Parse ``'w'`` / ``'b'`` (also ``'white'`` / ``'black'``)."""
        key = letter.strip().lower()
        if key in ("w", "white"):
            return cls.WHITE
        if key in ("b", "black"):
            return cls.BLACK
        raise ValueError(f"Invalid color: {letter!r}")

    def __str__(self) -> str:
        return self.name.lower()


class PieceKind(IntEnum):
    """Chess piece kinds; values match ``python-chess`` piece types."""

    PAWN = chess.PAWN
    KNIGHT = chess.KNIGHT
    BISHOP = chess.BISHOP
    ROOK = chess.ROOK
    QUEEN = chess.QUEEN
    KING = chess.KING

    @property
    def letter(self) -> str:
        """Lowercase piece letter, e.g. ``'n'``."""
        return chess.piece_symbol(self.value)


class GameStatus(IntEnum):
    """Game-state classification of a position, derived on demand."""

    ONGOING = 0
    CHECK = auto()
    CHECKMATE = auto()
    STALEMATE = auto()
    DRAW = auto()

    @property
    def is_over(self) -> bool:
        return self in (GameStatus.CHECKMATE, GameStatus.STALEMATE, GameStatus.DRAW)
