"""Position — complete game state (board + turn + rights + counters)."""

from __future__ import annotations

import logging

from chesstrainer.core.board import Board
from chesstrainer.core.enums import CastlingRights, Color, MoveStatus, PieceType
from chesstrainer.core.move import REJECTION_TEXT, Move, MoveResult
from chesstrainer.core.move_generator import MoveGenerator
from chesstrainer.core.piece import Piece
from chesstrainer.core.types import Square, file_of, make_square, rank_of, square_name

_LOGGER = logging.getLogger(__name__)

# Touching one of these squares (as source or destination) clears the rights.
_CASTLING_SQUARES: dict[Square, CastlingRights] = {
    make_square(0, 0): CastlingRights.WHITE_QUEENSIDE,
    make_square(7, 0): CastlingRights.WHITE_KINGSIDE,
    make_square(4, 0): CastlingRights.WHITE_BOTH,
    make_square(0, 7): CastlingRights.BLACK_QUEENSIDE,
    make_square(7, 7): CastlingRights.BLACK_KINGSIDE,
    make_square(4, 7): CastlingRights.BLACK_BOTH,
}

# King destination file -> (rook origin file, rook destination file)
_CASTLE_ROOK_FILES: dict[int, tuple[int, int]] = {
    2: (0, 3),
    6: (7, 5),
}


class Position:
    """Full chess position: board + side to move + castling + en passant + clocks.

    ``en_passant`` holds the square of the pawn that has just advanced two
    ranks (not the square it skipped); it is valid for the next move only.

    ``fullmove_number`` counts every executed move, starting from 0.

    The only sanctioned mutators are :meth:`play_legal_move` and
    :meth:`play_pseudo_legal_move`. Both return a :class:`MoveResult`;
    a rejected request leaves every field untouched.
    """

    __slots__ = (
        "board",
        "side_to_move",
        "castling",
        "en_passant",
        "halfmove_clock",
        "fullmove_number",
        "_king_squares",
    )

    def __init__(
        self,
        board: Board | None = None,
        side_to_move: Color = Color.WHITE,
        castling: CastlingRights = CastlingRights.ALL,
        en_passant: Square | None = None,
        halfmove_clock: int = 0,
        fullmove_number: int = 0,
    ) -> None:
        self.board = board if board is not None else Board.initial()
        self.side_to_move = side_to_move
        self.castling = castling
        self.en_passant = en_passant
        self.halfmove_clock = halfmove_clock
        self.fullmove_number = fullmove_number
        self._king_squares: list[Square | None] = [
            self.board.find(Piece(color, PieceType.KING)) for color in Color
        ]

    # ── Queries ──────────────────────────────────────────────────────────

    def piece_at(self, sq: Square) -> Piece | None:
        """Piece on *sq*, or None for an empty square."""
        return self.board[sq]

    def is_own_piece(self, sq: Square) -> bool:
        """Whether *sq* holds a piece of the side to move."""
        piece = self.board[sq]
        return piece is not None and piece.color == self.side_to_move

    def king_square(self, color: Color) -> Square:
        """Cached king square for *color*."""
        sq = self._king_squares[int(color)]
        if sq is None:
            raise ValueError(f"No {color.name} king on board")
        return sq

    # ── Move execution ───────────────────────────────────────────────────

    def play_legal_move(self, from_sq: Square, to_sq: Square) -> MoveResult:
        """Play *from_sq* → *to_sq* if it is legal, otherwise change nothing."""
        move = Move(from_sq, to_sq)
        if not MoveGenerator(self).is_legal(from_sq, to_sq):
            return self._reject(move, MoveStatus.NOT_LEGAL)
        self.apply_move(move)
        return MoveResult(move, MoveStatus.APPLIED)

    def play_pseudo_legal_move(self, from_sq: Square, to_sq: Square) -> MoveResult:
        """Play *from_sq* → *to_sq* if it is pseudo-legal, otherwise change nothing."""
        move = Move(from_sq, to_sq)
        if not MoveGenerator(self).is_pseudo_legal(from_sq, to_sq):
            return self._reject(move, MoveStatus.NOT_PSEUDO_LEGAL)
        self.apply_move(move)
        return MoveResult(move, MoveStatus.APPLIED)

    def apply_move(self, move: Move) -> None:
        """Execute *move* unconditionally and update all bookkeeping.

        The caller guarantees the move is at least pseudo-legal.
        """
        from_sq, to_sq = move.from_sq, move.to_sq
        piece = self.board[from_sq]
        if piece is None:
            raise ValueError(f"No piece on {square_name(from_sq)}")
        captured = self.board[to_sq]
        is_pawn = piece.piece_type == PieceType.PAWN

        self.side_to_move = self.side_to_move.opposite

        for sq in (from_sq, to_sq):
            revoked = _CASTLING_SQUARES.get(sq)
            if revoked is not None:
                self.castling &= ~revoked

        if is_pawn and abs(rank_of(to_sq) - rank_of(from_sq)) == 2:
            self.en_passant = to_sq
        else:
            self.en_passant = None

        self.fullmove_number += 1

        if is_pawn or (captured is not None and captured.color != piece.color):
            self.halfmove_clock = 0
        else:
            self.halfmove_clock += 1

        if piece.piece_type == PieceType.KING:
            self._king_squares[int(piece.color)] = to_sq

        self.board[to_sq] = piece
        self.board[from_sq] = None

        # En passant: diagonal pawn step onto an empty square
        if is_pawn and captured is None and file_of(from_sq) != file_of(to_sq):
            self.board[make_square(file_of(to_sq), rank_of(from_sq))] = None

        # Castling: the king jumps two files, the rook lands beside it.
        # A one-file king step onto the c- or g-file never moves a rook.
        if (
            piece.piece_type == PieceType.KING
            and abs(file_of(to_sq) - file_of(from_sq)) == 2
            and file_of(to_sq) in _CASTLE_ROOK_FILES
        ):
            rook_from_file, rook_to_file = _CASTLE_ROOK_FILES[file_of(to_sq)]
            rank = rank_of(to_sq)
            rook_from = make_square(rook_from_file, rank)
            self.board[make_square(rook_to_file, rank)] = self.board[rook_from]
            self.board[rook_from] = None

    def _reject(self, move: Move, status: MoveStatus) -> MoveResult:
        _LOGGER.debug(
            "Move from %s to %s is not %s.",
            square_name(move.from_sq),
            square_name(move.to_sq),
            REJECTION_TEXT[status],
        )
        return MoveResult(move, status)

    # ── Utilities ────────────────────────────────────────────────────────

    def copy(self) -> Position:
        """Independent deep copy of the whole state."""
        pos = Position.__new__(Position)
        pos.board = self.board.copy()
        pos.side_to_move = self.side_to_move
        pos.castling = self.castling
        pos.en_passant = self.en_passant
        pos.halfmove_clock = self.halfmove_clock
        pos.fullmove_number = self.fullmove_number
        pos._king_squares = self._king_squares.copy()
        return pos

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Position):
            return NotImplemented
        return (
            self.board == other.board
            and self.side_to_move == other.side_to_move
            and self.castling == other.castling
            and self.en_passant == other.en_passant
            and self.halfmove_clock == other.halfmove_clock
            and self.fullmove_number == other.fullmove_number
            and self._king_squares == other._king_squares
        )

    def __repr__(self) -> str:
        return f"{self.board!r}\n{self.side_to_move} to move"
