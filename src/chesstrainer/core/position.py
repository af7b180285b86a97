"""Position — immutable canonical board-state descriptor."""

from __future__ import annotations

from dataclasses import dataclass

import chess

from chesstrainer.core.enums import Color
from chesstrainer.core.move import Square
from chesstrainer.core.piece import Piece

STARTING_FEN = chess.STARTING_FEN


@dataclass(frozen=True, slots=True)
class Position:
    """A full board state encoded as canonical FEN.

    Instances are produced by :class:`~chesstrainer.core.engine.PositionEngine`
    after the rules oracle accepted the text, so ``fen`` is always valid.
    A transition yields a new ``Position``; existing ones never change.
    """

    fen: str

    def __str__(self) -> str:
        return self.fen

    @property
    def side_to_move(self) -> Color:
        return Color.WHITE if self.fen.split()[1] == "w" else Color.BLACK

    @property
    def placement(self) -> str:
        """Piece-placement field only."""
        return self.fen.split()[0]

    @property
    def fullmove_number(self) -> int:
        return int(self.fen.split()[5])

    def piece_at(self, square: Square) -> Piece | None:
        piece = chess.Board(self.fen).piece_at(square)
        return Piece.from_oracle(piece) if piece is not None else None

    def king_square(self, color: Color) -> Square | None:
        return chess.Board(self.fen).king(color.oracle_value)

    def pieces(self) -> dict[Square, Piece]:
        """All occupied squares, for renderers."""
        return {
            sq: Piece.from_oracle(p)
            for sq, p in chess.Board(self.fen).piece_map().items()
        }
