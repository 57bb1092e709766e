"""Board-notation (FEN-style) parsing and serialization.

The en-passant field names the square of the pawn that has just advanced
two ranks, matching :attr:`Position.en_passant`, and the last field counts
every move played since the start.
"""

from __future__ import annotations

from chesstrainer.core.board import Board
from chesstrainer.core.enums import CastlingRights, Color, PieceType
from chesstrainer.core.piece import Piece
from chesstrainer.core.position import Position
from chesstrainer.core.types import Square, make_square, parse_square, rank_of, square_name

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 0"

_CASTLING_CHARS: tuple[tuple[str, CastlingRights], ...] = (
    ("K", CastlingRights.WHITE_KINGSIDE),
    ("Q", CastlingRights.WHITE_QUEENSIDE),
    ("k", CastlingRights.BLACK_KINGSIDE),
    ("q", CastlingRights.BLACK_QUEENSIDE),
)


def position_from_fen(fen: str) -> Position:
    """Parse a board-notation string into a :class:`Position`."""
    parts = fen.split()
    if not (4 <= len(parts) <= 6):
        raise ValueError(f"Invalid FEN (need 4-6 fields): {fen!r}")

    placement, side_part, castling_part, ep_part = parts[:4]

    # 1. Piece placement
    ranks = placement.split("/")
    if len(ranks) != 8:
        raise ValueError(f"Invalid FEN board (must contain 8 ranks): {fen!r}")
    board = Board()
    for rank_idx, rank_text in enumerate(ranks):
        rank = 7 - rank_idx
        file = 0
        for ch in rank_text:
            if ch.isdigit():
                step = int(ch)
                if not (1 <= step <= 8):
                    raise ValueError(f"Invalid FEN digit {ch!r}: {fen!r}")
                file += step
            else:
                if file >= 8:
                    raise ValueError(f"Invalid FEN rank width: {fen!r}")
                board[make_square(file, rank)] = Piece.from_char(ch)
                file += 1
            if file > 8:
                raise ValueError(f"Invalid FEN rank width: {fen!r}")
        if file != 8:
            raise ValueError(f"Invalid FEN rank width: {fen!r}")

    # Exactly one king per colour
    for color in Color:
        king = Piece(color, PieceType.KING)
        count = sum(1 for sq in board.occupied(color) if board[sq] == king)
        if count != 1:
            raise ValueError(
                f"Invalid FEN board (need one {color} king, found {count}): {fen!r}"
            )

    # 2. Side to move
    if side_part == "w":
        side = Color.WHITE
    elif side_part == "b":
        side = Color.BLACK
    else:
        raise ValueError(f"Invalid FEN side-to-move field: {side_part!r}")

    # 3. Castling
    castling = CastlingRights.NONE
    if castling_part != "-":
        rights = dict(_CASTLING_CHARS)
        seen: set[str] = set()
        for ch in castling_part:
            right = rights.get(ch)
            if right is None or ch in seen:
                raise ValueError(f"Invalid FEN castling field: {castling_part!r}")
            seen.add(ch)
            castling |= right

    # 4. En passant (square of the pawn that just advanced two ranks)
    ep: Square | None = None
    if ep_part != "-":
        ep = parse_square(ep_part)
        expected_ep_rank = 4 if side == Color.WHITE else 3
        if rank_of(ep) != expected_ep_rank:
            raise ValueError(
                f"Invalid FEN en-passant square for side-to-move: {ep_part!r}"
            )

    # 5–6. Counters (optional)
    try:
        halfmove = int(parts[4]) if len(parts) > 4 else 0
        fullmove = int(parts[5]) if len(parts) > 5 else 0
    except ValueError:
        raise ValueError(f"Invalid FEN move counters: {fen!r}") from None
    if halfmove < 0 or fullmove < 0:
        raise ValueError(f"Invalid FEN move counters: {fen!r}")

    return Position(board, side, castling, ep, halfmove, fullmove)


def placement_to_fen(board: Board) -> str:
    """Piece-placement field only, rank 8 first."""
    rows: list[str] = []
    for rank in range(7, -1, -1):
        empty = 0
        row = ""
        for file in range(8):
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
    return "/".join(rows)


def castling_to_fen(castling: CastlingRights) -> str:
    """Castling field: subset of 'KQkq' in that order, or '-'."""
    text = "".join(ch for ch, right in _CASTLING_CHARS if castling & right)
    return text or "-"


def position_to_fen(pos: Position) -> str:
    """Serialise a :class:`Position` to board notation."""
    ep_str = square_name(pos.en_passant) if pos.en_passant is not None else "-"
    return " ".join(
        (
            placement_to_fen(pos.board),
            pos.side_to_move.fen_char,
            castling_to_fen(pos.castling),
            ep_str,
            str(pos.halfmove_clock),
            str(pos.fullmove_number),
        )
    )
