"""Full position: twelve piece bitboards plus side to move, castling, en passant and clocks."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from fenboard.core.enums import CastlingRights, Color
from fenboard.core.piece import Piece
from fenboard.core.piece_set import PieceSet
from fenboard.core.types import (
    SQUARE_COUNT,
    Bitboard,
    Square,
    is_valid_square,
    make_square,
)

_KIND_COUNT = 12
MAX_HALFMOVE_CLOCK = 0xFF
MAX_FULLMOVE_NUMBER = 0xFFFF


def _empty_sets() -> tuple[PieceSet, ...]:
    return tuple(PieceSet.empty(kind) for kind in Piece.all())


@dataclass(frozen=True, slots=True)
class Position:
    """Full chess position: bitboards + side to move + castling + en passant + clocks.

    ``piece_sets`` holds exactly one :class:`PieceSet` per kind, in
    :meth:`Piece.all` order, so ``piece_sets[kind.index].kind == kind``. The
    bitboards are the source of truth; :meth:`layout` is a derived view.

    Positions are immutable; nothing in this class changes an existing
    instance.
    """

    piece_sets: tuple[PieceSet, ...] = ()
    side_to_move: Color = Color.WHITE
    castling: CastlingRights = CastlingRights.ALL
    en_passant: Square | None = None
    halfmove_clock: int = 0
    fullmove_number: int = 1

    def __post_init__(self) -> None:
        if not self.piece_sets:
            object.__setattr__(self, "piece_sets", _empty_sets())
        else:
            object.__setattr__(self, "piece_sets", tuple(self.piece_sets))
        if len(self.piece_sets) != _KIND_COUNT:
            raise ValueError(
                f"Position needs {_KIND_COUNT} piece sets, got {len(self.piece_sets)}"
            )
        for kind, piece_set in zip(Piece.all(), self.piece_sets):
            if piece_set.kind != kind:
                raise ValueError(
                    f"Piece set for {piece_set.kind} found in the {kind} slot"
                )
        if self.en_passant is not None and not is_valid_square(self.en_passant):
            raise ValueError(f"Invalid en-passant square: {self.en_passant!r}")
        if not 0 <= self.halfmove_clock <= MAX_HALFMOVE_CLOCK:
            raise ValueError(f"Halfmove clock out of range: {self.halfmove_clock}")
        if not 1 <= self.fullmove_number <= MAX_FULLMOVE_NUMBER:
            raise ValueError(f"Fullmove number out of range: {self.fullmove_number}")

    # ── Factories ────────────────────────────────────────────────────────

    @classmethod
    def empty(cls) -> Position:
        """No pieces, white to move, full castling rights."""
        return cls()

    @classmethod
    def initial(cls) -> Position:
        """Standard starting position."""
        return cls(tuple(PieceSet.starting(kind) for kind in Piece.all()))

    @classmethod
    def from_pieces(
        cls,
        pieces: Mapping[Square, Piece],
        *,
        side_to_move: Color = Color.WHITE,
        castling: CastlingRights = CastlingRights.ALL,
        en_passant: Square | None = None,
        halfmove_clock: int = 0,
        fullmove_number: int = 1,
    ) -> Position:
        """Build a position from a ``{square: piece}`` mapping."""
        masks = [0] * _KIND_COUNT
        for sq, piece in pieces.items():
            if not is_valid_square(sq):
                raise ValueError(f"Square index out of range: {sq!r}")
            masks[piece.index] |= 1 << sq
        return cls(
            tuple(PieceSet(kind, mask) for kind, mask in zip(Piece.all(), masks)),
            side_to_move,
            castling,
            en_passant,
            halfmove_clock,
            fullmove_number,
        )

    @classmethod
    def from_fen(cls, fen: str) -> Position:
        from fenboard.core.notation.fen import position_from_fen

        return position_from_fen(fen)

    def to_fen(self) -> str:
        from fenboard.core.notation.fen import position_to_fen

        return position_to_fen(self)

    # ── Queries ──────────────────────────────────────────────────────────

    def pieces(self, kind: Piece) -> PieceSet:
        """Bitboard holding every *kind* piece."""
        return self.piece_sets[kind.index]

    @property
    def occupied(self) -> Bitboard:
        """Union of all twelve bitboards."""
        bits = 0
        for piece_set in self.piece_sets:
            bits |= piece_set.bits
        return bits

    def layout(self) -> list[Piece | None]:
        """Flatten the bitboards into one 64-entry board.

        Sets are overlaid in slot order; if two kinds claim the same square
        the later slot wins.
        """
        board: list[Piece | None] = [None] * SQUARE_COUNT
        for piece_set in self.piece_sets:
            for sq, piece in enumerate(piece_set.to_piece_layout()):
                if piece is not None:
                    board[sq] = piece
        return board

    def piece_at(self, sq: Square) -> Piece | None:
        if not is_valid_square(sq):
            raise ValueError(f"Square index out of range: {sq!r}")
        found: Piece | None = None
        for piece_set in self.piece_sets:
            if sq in piece_set:
                found = piece_set.kind
        return found

    # ── Dunder helpers ───────────────────────────────────────────────────

    def __str__(self) -> str:
        board = self.layout()
        rows: list[str] = []
        for rank in range(7, -1, -1):
            row = []
            for file in range(8):
                p = board[make_square(file, rank)]
                row.append(str(p) if p else ".")
            rows.append(f"{rank + 1} {' '.join(row)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
