"""PositionEngine — every legality decision of the application.

The engine keeps no mutable state: it validates position text into
:class:`Position` values and computes transitions between them.  Callers never
inspect piece placement to decide legality; they ask the engine and get either a
new position or a typed error.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

import chess

from chesstrainer.core.enums import GameStatus, PieceKind
from chesstrainer.core.errors import IllegalMoveError, InvalidPositionError
from chesstrainer.core.move import Move, Square, parse_square
from chesstrainer.core.oracle import RulesOracle
from chesstrainer.core.position import Position

_LOGGER = logging.getLogger(__name__)

# "12.", "12...", "12. ..." prefixes and "!", "?", "!?" suffixes produced by
# annotators are not part of SAN.
_MOVE_NUMBER_RE = re.compile(r"^\d+\s*\.+(\s*\.\.\.)?\s*")
_ANNOTATION_RE = re.compile(r"[!?]+$")
_UCI_RE = re.compile(r"^[a-h][1-8][a-h][1-8][qrbn]?$")

Notation = str | Move | tuple[Square | str, Square | str]


@dataclass(frozen=True, slots=True)
class PlayedMove:
    """A successful transition."""

    position: Position
    move: Move
    san: str


def normalize_notation(text: str) -> str:
    """Strip move numbers, annotation glyphs and whitespace from *text*."""
    cleaned = _MOVE_NUMBER_RE.sub("", text.strip())
    return _ANNOTATION_RE.sub("", cleaned).strip()


class PositionEngine:
    """Validates positions and applies moves through a :class:`RulesOracle`."""

    __slots__ = ("_oracle",)

    def __init__(self, oracle: RulesOracle | None = None) -> None:
        self._oracle = oracle or RulesOracle()

    @property
    def oracle(self) -> RulesOracle:
        return self._oracle

    # ── Positions ────────────────────────────────────────────────────────

    def load(self, position_text: str) -> Position:
        """Parse and validate *position_text*.

        Raises:
            InvalidPositionError: malformed or inconsistent text.  Nothing is
                adopted in that case.
        """
        if not isinstance(position_text, str) or not position_text.strip():
            raise InvalidPositionError(str(position_text), "empty position text")
        try:
            board = self._oracle.parse_position(position_text)
        except ValueError as exc:
            raise InvalidPositionError(position_text, str(exc)) from exc
        return Position(board.fen())

    def status(self, position: Position) -> GameStatus:
        """Checkmate / check / stalemate / draw classification of *position*.

        A check outranks a draw: a checking move in a dead position is CHECK.
        """
        fen = position.fen
        if self._oracle.is_checkmate(fen):
            return GameStatus.CHECKMATE
        if self._oracle.is_check(fen):
            return GameStatus.CHECK
        if self._oracle.is_stalemate(fen):
            return GameStatus.STALEMATE
        if self._oracle.is_draw(fen):
            return GameStatus.DRAW
        return GameStatus.ONGOING

    # ── Moves ────────────────────────────────────────────────────────────

    def legal_moves(self, position: Position) -> list[Move]:
        return [Move.from_oracle(m) for m in self._oracle.legal_moves(position.fen)]

    def legal_destinations(self, position: Position, square: Square) -> frozenset[Square]:
        """Target squares of the piece on *square*.

        Empty when the square is empty or the piece belongs to the side that is
        not to move.
        """
        moves = self._oracle.legal_moves(position.fen, from_square=square)
        return frozenset(m.to_square for m in moves)

    def is_legal(self, position: Position, move: Move) -> bool:
        try:
            self._match_legal(position, move)
        except IllegalMoveError:
            return False
        return True

    def apply(self, position: Position, move: Move) -> Position:
        """Return the position after *move*.

        Raises:
            IllegalMoveError: *move* is not legal; *position* is untouched.
        """
        return self.play(position, move).position

    def play(self, position: Position, move: Notation) -> PlayedMove:
        """Like :meth:`apply` but also reports the concrete move and its SAN.

        *move* may be a :class:`Move`, a square pair or a notation string.
        """
        concrete = self.resolve_notation(position, move)
        try:
            outcome = self._oracle.apply_move(position.fen, concrete.to_oracle())
        except ValueError as exc:
            raise IllegalMoveError(concrete, position.fen) from exc
        _LOGGER.debug("Applied %s (%s) to %s", concrete, outcome.san, position.fen)
        return PlayedMove(
            position=Position(outcome.fen),
            move=Move.from_oracle(outcome.move),
            san=outcome.san,
        )

    def resolve_notation(self, position: Position, notation: Notation) -> Move:
        """Turn SAN, UCI, a square pair or a :class:`Move` into a legal Move.

        A promotion without an explicit piece resolves to a queen.

        Raises:
            IllegalMoveError: the notation is malformed, ambiguous or illegal.
        """
        if isinstance(notation, Move):
            return self._match_legal(position, notation)
        if isinstance(notation, tuple):
            return self._match_legal(position, self._move_from_pair(position, notation))
        if not isinstance(notation, str):
            raise IllegalMoveError(notation, position.fen, "unsupported notation")

        text = normalize_notation(notation)
        if not text:
            raise IllegalMoveError(notation, position.fen, "empty notation")
        if _UCI_RE.match(text):
            try:
                uci = chess.Move.from_uci(text)
            except ValueError as exc:
                raise IllegalMoveError(notation, position.fen, str(exc)) from exc
            return self._match_legal(position, Move.from_oracle(uci))
        try:
            parsed = self._oracle.parse_notation(position.fen, text)
        except ValueError as exc:
            raise IllegalMoveError(notation, position.fen, str(exc) or "illegal move") from exc
        if not parsed:
            raise IllegalMoveError(notation, position.fen, "null move")
        return Move.from_oracle(parsed)

    # ── Internal helpers ─────────────────────────────────────────────────

    def _move_from_pair(
        self, position: Position, pair: tuple[Square | str, Square | str]
    ) -> Move:
        if len(pair) != 2:
            raise IllegalMoveError(pair, position.fen, "expected a square pair")
        try:
            squares = [parse_square(sq) if isinstance(sq, str) else int(sq) for sq in pair]
        except (TypeError, ValueError) as exc:
            raise IllegalMoveError(pair, position.fen, str(exc)) from exc
        if not all(0 <= sq < 64 for sq in squares):
            raise IllegalMoveError(pair, position.fen, "square out of range")
        return Move(squares[0], squares[1])

    def _match_legal(self, position: Position, move: Move) -> Move:
        """Find the legal move matching *move*'s squares.

        Promotion is only significant when the move actually promotes; a
        missing promotion piece means queen.
        """
        wanted = move.promotion or PieceKind.QUEEN
        for candidate in self._oracle.legal_moves(position.fen, from_square=move.from_sq):
            if candidate.to_square != move.to_sq:
                continue
            if candidate.promotion is None or candidate.promotion == wanted:
                return Move.from_oracle(candidate)
        raise IllegalMoveError(move, position.fen)
