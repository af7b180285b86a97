"""Core domain layer — positions, moves and the legality contract.

Chess rules come from ``python-chess``; this layer wraps them in immutable
values and typed errors.

Quick start::

    from chesstrainer.core import PositionEngine, STARTING_FEN

    engine = PositionEngine()
    pos = engine.load(STARTING_FEN)
    after = engine.apply(pos, engine.resolve_notation(pos, "e4"))
"""

from chesstrainer.core.engine import PlayedMove, PositionEngine, normalize_notation
from chesstrainer.core.enums import Color, GameStatus, PieceKind
from chesstrainer.core.errors import (
    IllegalMoveError,
    InvalidPositionError,
    ReportFormatError,
    TrainerError,
    UpstreamDataError,
)
from chesstrainer.core.move import Move, Square, parse_square, square_name
from chesstrainer.core.oracle import MoveOutcome, RulesOracle
from chesstrainer.core.piece import Piece
from chesstrainer.core.position import STARTING_FEN, Position

__all__ = [
    # Enums
    "Color",
    "GameStatus",
    "PieceKind",
    # Errors
    "IllegalMoveError",
    "InvalidPositionError",
    "ReportFormatError",
    "TrainerError",
    "UpstreamDataError",
    # Values
    "Move",
    "Piece",
    "Position",
    "STARTING_FEN",
    "Square",
    "parse_square",
    "square_name",
    # Rules
    "MoveOutcome",
    "PlayedMove",
    "PositionEngine",
    "RulesOracle",
    "normalize_notation",
]
