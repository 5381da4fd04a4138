"""Tests for Position construction and layout derivation."""

import pytest

from fenboard.core.enums import CastlingRights, Color, PieceType
from fenboard.core.piece import Piece
from fenboard.core.piece_set import PieceSet
from fenboard.core.position import Position
from fenboard.core.types import A1, A8, E1, E4, E8, H1, H8


class TestPositionEmpty:
    def test_no_pieces(self) -> None:
        pos = Position.empty()
        assert pos.layout() == [None] * 64
        assert pos.occupied == 0

    def test_default_metadata(self) -> None:
        pos = Position.empty()
        assert pos.side_to_move == Color.WHITE
        assert pos.castling == CastlingRights.ALL
        assert pos.en_passant is None
        assert pos.halfmove_clock == 0
        assert pos.fullmove_number == 1

    def test_slots_follow_kind_order(self) -> None:
        pos = Position.empty()
        assert [s.kind for s in pos.piece_sets] == list(Piece.all())


class TestPositionInitial:
    def test_white_rooks(self) -> None:
        layout = Position.initial().layout()
        assert layout[A1] == Piece(Color.WHITE, PieceType.ROOK)
        assert layout[H1] == Piece(Color.WHITE, PieceType.ROOK)

    def test_white_king(self) -> None:
        assert Position.initial().layout()[E1] == Piece(Color.WHITE, PieceType.KING)

    def test_white_pawns(self) -> None:
        layout = Position.initial().layout()
        for sq in range(8, 16):
            assert layout[sq] == Piece(Color.WHITE, PieceType.PAWN)

    def test_black_back_rank(self) -> None:
        layout = Position.initial().layout()
        expected = "rnbqkbnr"
        assert "".join(str(layout[sq]) for sq in range(A8, H8 + 1)) == expected

    def test_black_pawns(self) -> None:
        layout = Position.initial().layout()
        for sq in range(48, 56):
            assert layout[sq] == Piece(Color.BLACK, PieceType.PAWN)

    def test_empty_middle(self) -> None:
        layout = Position.initial().layout()
        for sq in range(16, 48):
            assert layout[sq] is None

    def test_thirty_two_pieces(self) -> None:
        assert Position.initial().occupied.bit_count() == 32

    def test_piece_at(self) -> None:
        pos = Position.initial()
        assert pos.piece_at(E8) == Piece(Color.BLACK, PieceType.KING)
        assert pos.piece_at(E4) is None

    def test_pieces_lookup(self) -> None:
        pos = Position.initial()
        knights = pos.pieces(Piece(Color.BLACK, PieceType.KNIGHT))
        assert len(knights) == 2

    def test_str_diagram(self) -> None:
        text = str(Position.initial())
        assert text.splitlines()[0] == "8 r n b q k b n r"
        assert "a b c d e f g h" in text


class TestPositionValidation:
    def test_wrong_set_count(self) -> None:
        with pytest.raises(ValueError, match="12 piece sets"):
            Position(Position.initial().piece_sets[:11])

    def test_set_in_wrong_slot(self) -> None:
        sets = list(Position.empty().piece_sets)
        sets[0], sets[1] = sets[1], sets[0]
        with pytest.raises(ValueError, match="slot"):
            Position(tuple(sets))

    @pytest.mark.parametrize("halfmove", [-1, 256])
    def test_halfmove_range(self, halfmove: int) -> None:
        with pytest.raises(ValueError, match="Halfmove"):
            Position(halfmove_clock=halfmove)

    @pytest.mark.parametrize("fullmove", [0, 65536])
    def test_fullmove_range(self, fullmove: int) -> None:
        with pytest.raises(ValueError, match="Fullmove"):
            Position(fullmove_number=fullmove)

    def test_en_passant_range(self) -> None:
        with pytest.raises(ValueError, match="en-passant"):
            Position(en_passant=64)


class TestPositionValue:
    def test_equal_positions(self) -> None:
        assert Position.initial() == Position.initial()
        assert Position.initial() != Position.empty()

    def test_hashable(self) -> None:
        assert len({Position.initial(), Position.initial()}) == 1

    def test_immutable(self) -> None:
        pos = Position.initial()
        with pytest.raises(AttributeError):
            pos.halfmove_clock = 3  # type: ignore[misc]

    def test_from_pieces(self) -> None:
        king = Piece(Color.WHITE, PieceType.KING)
        pos = Position.from_pieces({E1: king}, side_to_move=Color.BLACK)
        assert pos.pieces(king).bits == 1 << E1
        assert pos.side_to_move == Color.BLACK
        assert pos.layout()[E1] == king

    def test_overlap_later_slot_wins(self) -> None:
        sets = list(Position.empty().piece_sets)
        white_pawn = Piece(Color.WHITE, PieceType.PAWN)
        black_king = Piece(Color.BLACK, PieceType.KING)
        sets[white_pawn.index] = PieceSet(white_pawn, 1 << E4)
        sets[black_king.index] = PieceSet(black_king, 1 << E4)
        pos = Position(tuple(sets))
        assert pos.layout()[E4] == black_king
        assert pos.piece_at(E4) == black_king
