"""Tests for text rendering and glyph substitution."""

import pytest

from fenboard.core.position import Position
from fenboard.display import format_position, render_board, to_unicode

STARTING_GRID = (
    "r n b q k b n r \n"
    "p p p p p p p p \n"
    "                \n"
    "                \n"
    "                \n"
    "                \n"
    "P P P P P P P P \n"
    "R N B Q K B N R \n"
)


class TestRenderBoard:
    def test_starting_grid(self) -> None:
        assert render_board(Position.initial().layout()) == STARTING_GRID

    def test_eight_lines_of_sixteen(self) -> None:
        lines = render_board(Position.initial().layout()).splitlines()
        assert len(lines) == 8
        assert all(len(line) == 16 for line in lines)

    def test_empty_board(self) -> None:
        assert render_board(Position.empty().layout()) == (" " * 16 + "\n") * 8

    def test_rank_eight_first(self) -> None:
        pos = Position.from_fen("7k/8/8/8/8/8/8/K7 w - - 0 1")
        lines = render_board(pos.layout()).splitlines()
        assert lines[0] == " " * 14 + "k "
        assert lines[7] == "K " + " " * 14

    def test_wrong_size_rejected(self) -> None:
        with pytest.raises(ValueError, match="64 squares"):
            render_board([None] * 63)


class TestToUnicode:
    def test_starting_grid(self) -> None:
        text = to_unicode(STARTING_GRID)
        lines = text.splitlines()
        assert lines[0] == "♜ ♞ ♝ ♛ ♚ ♝ ♞ ♜ "
        assert lines[1] == "♟ " * 8
        assert lines[6] == "♙ " * 8
        assert lines[7] == "♖ ♘ ♗ ♕ ♔ ♗ ♘ ♖ "

    def test_other_characters_untouched(self) -> None:
        assert to_unicode("a1 - 8/\n") == "a1 - 8/\n"

    def test_format_position(self) -> None:
        pos = Position.initial()
        assert format_position(pos) == STARTING_GRID
        assert format_position(pos, unicode=True) == to_unicode(STARTING_GRID)
