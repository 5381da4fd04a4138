"""Occupancy bitboard for a single piece kind."""

from __future__ import annotations

from dataclasses import dataclass

from fenboard.core.enums import Color, PieceType
from fenboard.core.piece import Piece
from fenboard.core.types import (
    FULL_MASK,
    SQUARE_COUNT,
    Bitboard,
    Square,
    is_valid_square,
    square_bit,
)

# Back-rank / pawn-rank patterns, bit 0 = a-file.
_STARTING_ROWS: dict[PieceType, int] = {
    PieceType.PAWN: 0b11111111,
    PieceType.KNIGHT: 0b01000010,
    PieceType.BISHOP: 0b00100100,
    PieceType.ROOK: 0b10000001,
    PieceType.QUEEN: 0b00001000,
    PieceType.KING: 0b00010000,
}


def _starting_rank(piece: Piece) -> int:
    home = 1 if piece.piece_type == PieceType.PAWN else 0
    return home if piece.color == Color.WHITE else 7 - home


def squares_from_bitboard(bitboard: Bitboard) -> list[Square]:
    """Ascending list of squares whose bit is set."""
    squares: list[Square] = []
    while bitboard:
        lsb = bitboard & -bitboard
        squares.append(lsb.bit_length() - 1)
        bitboard ^= lsb
    return squares


@dataclass(frozen=True, slots=True)
class PieceSet:
    """Immutable bitboard: bit *i* set ⇔ a piece of :attr:`kind` stands on square *i*."""

    kind: Piece
    bits: Bitboard = 0

    def __post_init__(self) -> None:
        if not 0 <= self.bits <= FULL_MASK:
            raise ValueError(f"Bitboard does not fit in 64 bits: {self.bits:#x}")

    # ── Factories ────────────────────────────────────────────────────────

    @classmethod
    def empty(cls, kind: Piece) -> PieceSet:
        return cls(kind, 0)

    @classmethod
    def starting(cls, kind: Piece) -> PieceSet:
        """Opening mask for *kind*, e.g. white rooks on a1 and h1."""
        row = _STARTING_ROWS[kind.piece_type]
        return cls(kind, row << (8 * _starting_rank(kind)))

    def with_square(self, sq: Square) -> PieceSet:
        """New set with *sq* added."""
        if not is_valid_square(sq):
            raise ValueError(f"Square index out of range: {sq!r}")
        return PieceSet(self.kind, self.bits | square_bit(sq))

    # ── Queries ──────────────────────────────────────────────────────────

    def squares(self) -> list[Square]:
        return squares_from_bitboard(self.bits)

    def to_piece_layout(self) -> list[Piece | None]:
        """64 entries; entry *i* is :attr:`kind` when bit *i* is set."""
        return [
            self.kind if self.bits >> sq & 1 else None for sq in range(SQUARE_COUNT)
        ]

    def __contains__(self, sq: object) -> bool:
        if not isinstance(sq, int) or not is_valid_square(sq):
            return False
        return bool(self.bits & square_bit(sq))

    def __len__(self) -> int:
        return self.bits.bit_count()

    def __bool__(self) -> bool:
        return self.bits != 0
