"""FEN parsing and serialization."""

from __future__ import annotations

import logging

from fenboard.core.enums import CastlingRights, Color
from fenboard.core.errors import (
    InvalidHalfmoveClockError,
    InvalidMoveNumberError,
    InvalidPieceCharError,
    InvalidPlacementError,
    MalformedFenError,
    NotationError,
    RankOverflowError,
)
from fenboard.core.piece import Piece
from fenboard.core.position import MAX_FULLMOVE_NUMBER, MAX_HALFMOVE_CLOCK, Position
from fenboard.core.types import BOARD_SIZE, Square, make_square, parse_square, square_name

_LOGGER = logging.getLogger(__name__)

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"

FEN_FIELDS = (
    "piece placement",
    "side to move",
    "castling",
    "en passant",
    "halfmove clock",
    "fullmove number",
)


def position_from_fen(fen: str) -> Position:
    """Parse a FEN string into a :class:`Position`.

    Every field is validated except en passant: text that is not a square
    name (``-`` included) simply means there is no target square.
    """
    parts = fen.split()
    if len(parts) < len(FEN_FIELDS):
        missing = FEN_FIELDS[len(parts)]
        raise MalformedFenError(f"Invalid FEN (missing {missing} field): {fen!r}")
    if len(parts) > len(FEN_FIELDS):
        raise MalformedFenError(
            f"Invalid FEN (need {len(FEN_FIELDS)} fields, got {len(parts)}): {fen!r}"
        )

    placement, side_part, castling_part, ep_part, halfmove_part, fullmove_part = parts

    side = Color.from_char(side_part)
    castling = CastlingRights.from_fen(castling_part)
    ep = _parse_en_passant(ep_part)
    halfmove = _parse_counter(
        halfmove_part, 0, MAX_HALFMOVE_CLOCK, InvalidHalfmoveClockError, "halfmove clock"
    )
    fullmove = _parse_counter(
        fullmove_part, 1, MAX_FULLMOVE_NUMBER, InvalidMoveNumberError, "fullmove number"
    )
    pieces = _parse_placement(placement)

    _LOGGER.debug(
        "Parsed FEN %r: %d pieces, %s to move", fen, len(pieces), side
    )
    return Position.from_pieces(
        pieces,
        side_to_move=side,
        castling=castling,
        en_passant=ep,
        halfmove_clock=halfmove,
        fullmove_number=fullmove,
    )


def _parse_en_passant(text: str) -> Square | None:
    try:
        return parse_square(text)
    except ValueError:
        if text != "-":
            _LOGGER.debug("Ignoring unparsable en-passant field %r", text)
        return None


def _parse_counter(
    text: str,
    lowest: int,
    highest: int,
    error: type[NotationError],
    field: str,
) -> int:
    if not (text.isascii() and text.isdigit()):
        raise error(f"Invalid FEN {field}: {text!r}")
    value = int(text)
    if not lowest <= value <= highest:
        raise error(f"FEN {field} out of range {lowest}..{highest}: {text!r}")
    return value


def _parse_placement(placement: str) -> dict[Square, Piece]:
    """Scan the placement field rank by rank, from rank 8 down to rank 1."""
    pieces: dict[Square, Piece] = {}
    ranks = placement.split("/")
    if len(ranks) != BOARD_SIZE:
        raise InvalidPlacementError(
            f"Invalid FEN board (must contain 8 ranks, got {len(ranks)}): {placement!r}"
        )

    for rank_idx, rank_text in enumerate(ranks):
        rank = BOARD_SIZE - 1 - rank_idx
        file = 0
        for ch in rank_text:
            if ch in "12345678":
                file += int(ch)
            else:
                try:
                    piece = Piece.from_char(ch)
                except NotationError as exc:
                    raise InvalidPieceCharError(
                        f"Invalid FEN piece character {ch!r} in rank {rank + 1}"
                    ) from exc
                if file < BOARD_SIZE:
                    pieces[make_square(file, rank)] = piece
                file += 1  # past the h-file is caught just below
            if file > BOARD_SIZE:
                raise RankOverflowError(
                    f"FEN rank {rank + 1} runs past the h-file: {rank_text!r}"
                )
        if file != BOARD_SIZE:
            raise InvalidPlacementError(
                f"FEN rank {rank + 1} covers {file} files, expected 8: {rank_text!r}"
            )
    return pieces


def position_to_fen(pos: Position) -> str:
    """Serialise a :class:`Position` to FEN."""
    board = pos.layout()

    # 1. Board
    rows: list[str] = []
    for rank in range(BOARD_SIZE - 1, -1, -1):
        empty = 0
        row = ""
        for file in range(BOARD_SIZE):
            piece = board[make_square(file, rank)]
            if piece is None:
                empty += 1
            else:
                if empty:
                    row += str(empty)
                    empty = 0
                row += str(piece)
        if empty:
            row += str(empty)
        rows.append(row)
    board_str = "/".join(rows)

    # 2–4. Side, castling, en passant
    side_str = pos.side_to_move.fen_char
    castling_str = pos.castling.to_fen()
    ep_str = square_name(pos.en_passant) if pos.en_passant is not None else "-"

    return (
        f"{board_str} {side_str} {castling_str} {ep_str} "
        f"{pos.halfmove_clock} {pos.fullmove_number}"
    )
