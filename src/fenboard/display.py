"""Plain-text board rendering and Unicode glyph substitution."""

from __future__ import annotations

from collections.abc import Sequence

from fenboard.core.piece import Piece, glyph_table
from fenboard.core.position import Position
from fenboard.core.types import BOARD_SIZE, SQUARE_COUNT, make_square

_EMPTY_SQUARE = "  "
_GLYPHS = str.maketrans(glyph_table())


def render_board(layout: Sequence[Piece | None]) -> str:
    """Render a 64-square layout as eight lines, rank 8 first.

    Every square takes two characters: the piece letter and a space, or two
    spaces when empty. Each line ends with a newline.
    """
    if len(layout) != SQUARE_COUNT:
        raise ValueError(f"Layout must have {SQUARE_COUNT} squares, got {len(layout)}")

    lines: list[str] = []
    for rank in range(BOARD_SIZE - 1, -1, -1):
        cells = []
        for file in range(BOARD_SIZE):
            piece = layout[make_square(file, rank)]
            cells.append(f"{piece} " if piece is not None else _EMPTY_SQUARE)
        lines.append("".join(cells) + "\n")
    return "".join(lines)


def to_unicode(text: str) -> str:
    """Swap ASCII piece letters for chess glyphs; everything else is kept."""
    return text.translate(_GLYPHS)


def format_position(position: Position, *, unicode: bool = False) -> str:
    text = render_board(position.layout())
    return to_unicode(text) if unicode else text
