"""Rules oracle — the thin adapter over ``python-chess``.

Everything that needs actual chess rules goes through :class:`RulesOracle`;
the rest of the package only sees FEN strings and ``chess.Move`` values.
"""

from __future__ import annotations

from dataclasses import dataclass

import chess

FEN_FIELD_COUNT = 6


@dataclass(frozen=True, slots=True)
class MoveOutcome:
    """Result of applying a legal move."""

    fen: str
    move: chess.Move
    san: str
    is_check: bool
    is_checkmate: bool
    is_stalemate: bool
    is_draw: bool


def _status_reason(status: chess.Status) -> str:
    names = [
        flag.name.lower().replace("_", " ")
        for flag in chess.Status
        if flag.value and flag.name and flag in status
    ]
    return ", ".join(names) or "inconsistent position"


class RulesOracle:
    """Stateless legality and transition queries over FEN strings."""

    __slots__ = ()

    def parse_position(self, text: str) -> chess.Board:
        """Return a board for *text*.

        Raises:
            ValueError: malformed text, or a position python-chess reports as
                invalid (missing kings, too many pawns, bad castling rights...).
        """
        fields = text.split()
        if len(fields) != FEN_FIELD_COUNT:
            raise ValueError(
                f"need {FEN_FIELD_COUNT} space-separated fields, got {len(fields)}"
            )
        board = chess.Board(" ".join(fields))
        status = board.status()
        if status != chess.STATUS_VALID:
            raise ValueError(_status_reason(status))
        return board

    def legal_moves(
        self, fen: str, from_square: chess.Square | None = None
    ) -> list[chess.Move]:
        board = chess.Board(fen)
        if from_square is None:
            return list(board.legal_moves)
        return [m for m in board.legal_moves if m.from_square == from_square]

    def parse_notation(self, fen: str, notation: str) -> chess.Move:
        """Parse SAN (or UCI) against *fen*.

        Raises:
            ValueError: ``chess.InvalidMoveError``, ``chess.IllegalMoveError``
                or ``chess.AmbiguousMoveError``.
        """
        board = chess.Board(fen)
        return board.parse_san(notation)

    def apply_move(self, fen: str, move: chess.Move) -> MoveOutcome:
        """Apply a legal *move* to *fen*.

        Raises:
            chess.IllegalMoveError: *move* is not legal in *fen*.
        """
        board = chess.Board(fen)
        if not board.is_legal(move):
            raise chess.IllegalMoveError(f"illegal move: {move.uci()} in {fen}")
        san = board.san(move)
        board.push(move)
        is_checkmate = board.is_checkmate()
        is_stalemate = board.is_stalemate()
        return MoveOutcome(
            fen=board.fen(),
            move=move,
            san=san,
            is_check=board.is_check(),
            is_checkmate=is_checkmate,
            is_stalemate=is_stalemate,
            is_draw=is_stalemate or self._is_draw(board),
        )

    def is_check(self, fen: str) -> bool:
        return chess.Board(fen).is_check()

    def is_checkmate(self, fen: str) -> bool:
        return chess.Board(fen).is_checkmate()

    def is_stalemate(self, fen: str) -> bool:
        return chess.Board(fen).is_stalemate()

    def is_draw(self, fen: str) -> bool:
        board = chess.Board(fen)
        return board.is_stalemate() or self._is_draw(board)

    @staticmethod
    def _is_draw(board: chess.Board) -> bool:
        # No move stack, so repetition cannot be detected here.
        return board.is_insufficient_material() or board.halfmove_clock >= 100
