"""Notation package: FEN parsing and serialization."""

from fenboard.core.notation.fen import (
    FEN_FIELDS,
    STARTING_FEN,
    position_from_fen,
    position_to_fen,
)

__all__ = [
    "FEN_FIELDS",
    "STARTING_FEN",
    "position_from_fen",
    "position_to_fen",
]
