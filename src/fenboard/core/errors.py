"""Notation errors raised by the piece, colour, castling and FEN codecs.

Every error is a :class:`ValueError`, so callers that only care about "bad
input" can catch that alone.
"""

from __future__ import annotations


class NotationError(ValueError):
    """Base class for every text-codec failure."""


# ── Piece / colour codecs ────────────────────────────────────────────────────


class InvalidLengthError(NotationError):
    """Piece text is not exactly one character long."""


class InvalidPieceLetterError(NotationError):
    """Single character that is not one of ``PNBRQK`` in either case."""


class InvalidColorError(NotationError):
    """Side-to-move text is neither ``w`` nor ``b``."""


# ── Castling codec ───────────────────────────────────────────────────────────


class InvalidCastlingError(NotationError):
    """Castling-availability text could not be parsed."""


class CastlingTooLongError(InvalidCastlingError):
    """Castling text longer than the four possible letters."""


class UnknownCastleSymbolError(InvalidCastlingError):
    """Castling text contains a character outside ``KQkq``."""

    def __init__(self, symbol: str) -> None:
        super().__init__(f"Unknown castling symbol: {symbol!r}")
        self.symbol = symbol


# ── FEN ──────────────────────────────────────────────────────────────────────


class FenError(NotationError):
    """A FEN record is structurally wrong."""


class MalformedFenError(FenError):
    """Missing or surplus whitespace-separated FEN fields."""


class InvalidHalfmoveClockError(FenError):
    """Halfmove clock is not an integer in 0..255."""


class InvalidMoveNumberError(FenError):
    """Fullmove number is not an integer in 1..65535."""


class InvalidPieceCharError(FenError):
    """Placement field contains a character that is no piece or digit."""


class RankOverflowError(FenError):
    """A placement rank describes more than eight files."""


class InvalidPlacementError(FenError):
    """Placement field has the wrong number of ranks or a short rank."""
