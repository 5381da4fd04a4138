"""Core enumerations: colours, piece types and castling availability."""

from __future__ import annotations

from enum import IntEnum, IntFlag, auto

from fenboard.core.errors import (
    CastlingTooLongError,
    InvalidColorError,
    UnknownCastleSymbolError,
)


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    @property
    def fen_char(self) -> str:
        """Side-to-move letter used in FEN: ``w`` or ``b``."""
        return "w" if self is Color.WHITE else "b"

    @classmethod
    def from_char(cls, text: str) -> Color:
        """Parse a side-to-move letter, case-insensitively."""
        lowered = text.lower()
        if lowered == "w":
            return cls.WHITE
        if lowered == "b":
            return cls.BLACK
        raise InvalidColorError(f"Invalid side-to-move: {text!r}")

    def __str__(self) -> str:
        return self.name.lower()


class PieceType(IntEnum):
    """Chess piece types ordered by conventional value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6


class CastlingRights(IntFlag):
    """Bitmask for castling availability."""

    NONE = 0
    WHITE_KINGSIDE = auto()
    WHITE_QUEENSIDE = auto()
    BLACK_KINGSIDE = auto()
    BLACK_QUEENSIDE = auto()

    WHITE_BOTH = WHITE_KINGSIDE | WHITE_QUEENSIDE
    BLACK_BOTH = BLACK_KINGSIDE | BLACK_QUEENSIDE
    ALL = WHITE_BOTH | BLACK_BOTH

    def kingside(self, color: Color) -> bool:
        flag = (
            CastlingRights.WHITE_KINGSIDE
            if color == Color.WHITE
            else CastlingRights.BLACK_KINGSIDE
        )
        return bool(self & flag)

    def queenside(self, color: Color) -> bool:
        flag = (
            CastlingRights.WHITE_QUEENSIDE
            if color == Color.WHITE
            else CastlingRights.BLACK_QUEENSIDE
        )
        return bool(self & flag)

    def to_fen(self) -> str:
        """FEN castling field: ``KQkq`` order, ``-`` when nothing is left."""
        text = "".join(ch for ch, flag in _CASTLING_SYMBOLS.items() if self & flag)
        return text or "-"

    @classmethod
    def from_fen(cls, text: str) -> CastlingRights:
        """Parse a FEN castling field.

        ``-`` and the empty string mean no rights. Repeated letters are
        accepted and have no further effect.
        """
        if len(text) > len(_CASTLING_SYMBOLS):
            raise CastlingTooLongError(f"Castling field too long: {text!r}")
        if text == "-":
            return cls.NONE

        rights = cls.NONE
        for ch in text:
            flag = _CASTLING_SYMBOLS.get(ch)
            if flag is None:
                raise UnknownCastleSymbolError(ch)
            rights |= flag
        return rights


_CASTLING_SYMBOLS: dict[str, CastlingRights] = {
    "K": CastlingRights.WHITE_KINGSIDE,
    "Q": CastlingRights.WHITE_QUEENSIDE,
    "k": CastlingRights.BLACK_KINGSIDE,
    "q": CastlingRights.BLACK_QUEENSIDE,
}
