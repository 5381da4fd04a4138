"""Piece value object."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from fenboard.core.enums import Color, PieceType
from fenboard.core.errors import InvalidLengthError, InvalidPieceLetterError

_PIECE_TYPE_COUNT = len(PieceType)

# FEN character ↔ (Color, PieceType)
_CHAR_MAP: dict[str, tuple[Color, PieceType]] = {
    "P": (Color.WHITE, PieceType.PAWN),
    "N": (Color.WHITE, PieceType.KNIGHT),
    "B": (Color.WHITE, PieceType.BISHOP),
    "R": (Color.WHITE, PieceType.ROOK),
    "Q": (Color.WHITE, PieceType.QUEEN),
    "K": (Color.WHITE, PieceType.KING),
    "p": (Color.BLACK, PieceType.PAWN),
    "n": (Color.BLACK, PieceType.KNIGHT),
    "b": (Color.BLACK, PieceType.BISHOP),
    "r": (Color.BLACK, PieceType.ROOK),
    "q": (Color.BLACK, PieceType.QUEEN),
    "k": (Color.BLACK, PieceType.KING),
}

_UNICODE: dict[tuple[Color, PieceType], str] = {
    (Color.WHITE, PieceType.PAWN): "♙",
    (Color.WHITE, PieceType.KNIGHT): "♘",
    (Color.WHITE, PieceType.BISHOP): "♗",
    (Color.WHITE, PieceType.ROOK): "♖",
    (Color.WHITE, PieceType.QUEEN): "♕",
    (Color.WHITE, PieceType.KING): "♔",
    (Color.BLACK, PieceType.PAWN): "♟",
    (Color.BLACK, PieceType.KNIGHT): "♞",
    (Color.BLACK, PieceType.BISHOP): "♝",
    (Color.BLACK, PieceType.ROOK): "♜",
    (Color.BLACK, PieceType.QUEEN): "♛",
    (Color.BLACK, PieceType.KING): "♚",
}

_FEN_CHARS: dict[tuple[Color, PieceType], str] = {v: k for k, v in _CHAR_MAP.items()}


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable value object representing a chess piece.

    A piece doubles as the *kind* key of a bitboard: one
    :class:`~fenboard.core.piece_set.PieceSet` exists per colour and type.
    """

    color: Color
    piece_type: PieceType

    # ── Serialisation ────────────────────────────────────────────────────

    def __str__(self) -> str:
        """FEN character (uppercase = white, lowercase = black)."""
        return _FEN_CHARS[(self.color, self.piece_type)]

    @classmethod
    def from_char(cls, char: str) -> Piece:
        """Create piece from FEN character, e.g. 'N' → white knight."""
        if len(char) != 1:
            raise InvalidLengthError(
                f"Piece text must be a single character: {char!r}"
            )
        try:
            color, ptype = _CHAR_MAP[char]
        except KeyError:
            raise InvalidPieceLetterError(f"Invalid piece character: {char!r}") from None
        return cls(color, ptype)

    @property
    def symbol(self) -> str:
        """Unicode chess symbol, e.g. ♞."""
        return _UNICODE[(self.color, self.piece_type)]

    # ── Kind ordering ────────────────────────────────────────────────────

    @property
    def index(self) -> int:
        """Slot 0–11: white pawn..king, then black pawn..king."""
        return int(self.color) * _PIECE_TYPE_COUNT + int(self.piece_type) - 1

    @classmethod
    def all(cls) -> Iterator[Piece]:
        """All twelve kinds in slot order."""
        for color in Color:
            for ptype in PieceType:
                yield cls(color, ptype)


def glyph_table() -> dict[str, str]:
    """ASCII letter → Unicode glyph for all twelve pieces."""
    return {_FEN_CHARS[key]: glyph for key, glyph in _UNICODE.items()}
