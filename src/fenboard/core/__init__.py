"""Core domain layer: piece bitboards, positions and FEN, with zero external dependencies.

Quick start::

    from fenboard.core import Position, position_from_fen, STARTING_FEN

    pos = position_from_fen(STARTING_FEN)
    print(pos.to_fen())
"""

from fenboard.core.enums import CastlingRights, Color, PieceType
from fenboard.core.errors import (
    CastlingTooLongError,
    FenError,
    InvalidCastlingError,
    InvalidColorError,
    InvalidHalfmoveClockError,
    InvalidLengthError,
    InvalidMoveNumberError,
    InvalidPieceCharError,
    InvalidPieceLetterError,
    InvalidPlacementError,
    MalformedFenError,
    NotationError,
    RankOverflowError,
    UnknownCastleSymbolError,
)
from fenboard.core.notation import STARTING_FEN, position_from_fen, position_to_fen
from fenboard.core.piece import Piece
from fenboard.core.piece_set import PieceSet
from fenboard.core.position import Position
from fenboard.core.types import (
    Bitboard,
    Square,
    file_of,
    make_square,
    parse_square,
    rank_of,
    square_name,
)

__all__ = [
    # Enums / flags
    "CastlingRights",
    "Color",
    "PieceType",
    # Types / helpers
    "Bitboard",
    "Square",
    "file_of",
    "make_square",
    "parse_square",
    "rank_of",
    "square_name",
    # Domain objects
    "Piece",
    "PieceSet",
    "Position",
    # Notation
    "STARTING_FEN",
    "position_from_fen",
    "position_to_fen",
    # Errors
    "CastlingTooLongError",
    "FenError",
    "InvalidCastlingError",
    "InvalidColorError",
    "InvalidHalfmoveClockError",
    "InvalidLengthError",
    "InvalidMoveNumberError",
    "InvalidPieceCharError",
    "InvalidPieceLetterError",
    "InvalidPlacementError",
    "MalformedFenError",
    "NotationError",
    "RankOverflowError",
    "UnknownCastleSymbolError",
]
