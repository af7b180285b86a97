"""Move value object (UCI-style representation)."""

from __future__ import annotations

from dataclasses import dataclass

import chess

from chesstrainer.core.enums import PieceKind

Square = chess.Square  # 0–63, a1=0 … h8=63


def parse_square(name: str) -> Square:
    """Parse square name, e.g. 'e4' → 28."""
    try:
        return chess.parse_square(name.strip().lower())
    except ValueError:
        raise ValueError(f"Invalid square name: {name!r}") from None


def square_name(sq: Square) -> str:
    """Human-readable name, e.g. 0 → 'a1', 63 → 'h8'."""
    return chess.square_name(sq)


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable value object: origin, destination, optional promotion."""

    from_sq: Square
    to_sq: Square
    promotion: PieceKind | None = None

    def __str__(self) -> str:
        base = f"{square_name(self.from_sq)}{square_name(self.to_sq)}"
        if self.promotion is not None:
            base += self.promotion.letter
        return base

    @property
    def uci(self) -> str:
        """UCI long-algebraic notation."""
        return str(self)

    @classmethod
    def from_squares(
        cls, from_name: str, to_name: str, promotion: PieceKind | None = None
    ) -> Move:
        """Build a move from square names, e.g. ``Move.from_squares("e2", "e4")``."""
        return cls(parse_square(from_name), parse_square(to_name), promotion)

    @classmethod
    def from_oracle(cls, move: chess.Move) -> Move:
        promotion = PieceKind(move.promotion) if move.promotion else None
        return cls(move.from_square, move.to_square, promotion)

    def to_oracle(self) -> chess.Move:
        promotion = int(self.promotion) if self.promotion is not None else None
        return chess.Move(self.from_sq, self.to_sq, promotion=promotion)
