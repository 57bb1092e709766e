"""Pseudo-legal and legal move generation + check detection."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, ClassVar

from chesstrainer.core.enums import CastlingRights, Color, PieceType
from chesstrainer.core.move import Move
from chesstrainer.core.types import Square, file_of, make_square, rank_of

if TYPE_CHECKING:
    from chesstrainer.core.position import Position


KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))

# Per color: (forward step, home rank, en-passant rank, last rank)
_PAWN_RANKS: dict[Color, tuple[int, int, int, int]] = {
    Color.WHITE: (1, 1, 4, 7),
    Color.BLACK: (-1, 6, 3, 0),
}

# Per color: (right, king destination, squares that must be empty)
_CASTLES: dict[Color, tuple[tuple[CastlingRights, Square, tuple[Square, ...]], ...]] = {
    Color.WHITE: (
        (CastlingRights.WHITE_KINGSIDE, make_square(6, 0), (make_square(5, 0), make_square(6, 0))),
        (
            CastlingRights.WHITE_QUEENSIDE,
            make_square(2, 0),
            (make_square(1, 0), make_square(2, 0), make_square(3, 0)),
        ),
    ),
    Color.BLACK: (
        (CastlingRights.BLACK_KINGSIDE, make_square(6, 7), (make_square(5, 7), make_square(6, 7))),
        (
            CastlingRights.BLACK_QUEENSIDE,
            make_square(2, 7),
            (make_square(1, 7), make_square(2, 7), make_square(3, 7)),
        ),
    ),
}


# -- Precomputed lookup tables ---------------------------------------------


def _build_targets(
    offsets: tuple[tuple[int, int], ...],
) -> tuple[tuple[Square, ...], ...]:
    targets: list[tuple[Square, ...]] = []
    for sq in range(64):
        file_idx = sq & 7
        rank_idx = sq >> 3
        moves: list[Square] = []
        for df, dr in offsets:
            af = file_idx + df
            ar = rank_idx + dr
            if 0 <= af < 8 and 0 <= ar < 8:
                moves.append(make_square(af, ar))
        targets.append(tuple(moves))
    return tuple(targets)


def _build_rays(
    directions: tuple[tuple[int, int], ...],
) -> tuple[tuple[tuple[Square, ...], ...], ...]:
    rays_per_square: list[tuple[tuple[Square, ...], ...]] = []
    for sq in range(64):
        file_idx = sq & 7
        rank_idx = sq >> 3
        square_rays: list[tuple[Square, ...]] = []
        for df, dr in directions:
            af = file_idx + df
            ar = rank_idx + dr
            ray: list[Square] = []
            while 0 <= af < 8 and 0 <= ar < 8:
                ray.append(make_square(af, ar))
                af += df
                ar += dr
            square_rays.append(tuple(ray))
        rays_per_square.append(tuple(square_rays))
    return tuple(rays_per_square)


_KNIGHT_TARGETS = _build_targets(KNIGHT_OFFSETS)
_KING_TARGETS = _build_targets(KING_OFFSETS)

_BISHOP_RAYS = _build_rays(BISHOP_DIRS)
_ROOK_RAYS = _build_rays(ROOK_DIRS)


class MoveGenerator:
    """Answers move questions about a single :class:`Position`.

    Pseudo-legal sets follow each piece's movement rules only. Legal sets
    additionally drop moves that leave the mover's own king in check; that
    test runs the move on a throw-away copy of the position, so the
    position handed to the generator is never modified.

    Castling is offered whenever the right is still held and the squares
    between king and rook are empty. Whether the king is in check, crosses
    an attacked square, or lands on one is not examined.
    """

    __slots__ = ("_pos", "_board")

    _DISPATCH: ClassVar[dict[PieceType, Callable[[MoveGenerator, Square, Color], list[Square]]]]

    def __init__(self, position: Position) -> None:
        self._pos = position
        self._board = position.board

    # -- Public API ---------------------------------------------------------

    def pseudo_legal_moves(self, sq: Square) -> list[Square]:
        """Destinations reachable from *sq*, ignoring own-king safety."""
        piece = self._board[sq]
        if piece is None:
            return []
        return self._DISPATCH[piece.piece_type](self, sq, piece.color)

    def legal_moves(self, sq: Square) -> list[Square]:
        """Pseudo-legal destinations that do not expose the mover's king."""
        piece = self._board[sq]
        if piece is None:
            return []
        return [
            to_sq
            for to_sq in self.pseudo_legal_moves(sq)
            if not self.king_would_be_in_check(piece.color, sq, to_sq)
        ]

    def is_pseudo_legal(self, from_sq: Square, to_sq: Square) -> bool:
        return to_sq in self.pseudo_legal_moves(from_sq)

    def is_legal(self, from_sq: Square, to_sq: Square) -> bool:
        return to_sq in self.legal_moves(from_sq)

    def has_legal_moves(self, color: Color) -> bool:
        """Whether any piece of *color* has at least one legal move."""
        return any(self.legal_moves(sq) for sq in self._board.occupied(color))

    def all_legal_moves(self) -> list[Move]:
        """All legal moves for the side to move."""
        return [
            Move(sq, to_sq)
            for sq in self._board.occupied(self._pos.side_to_move)
            for to_sq in self.legal_moves(sq)
        ]

    # -- Check detection ----------------------------------------------------

    def is_in_check(self, color: Color) -> bool:
        """Is *color*'s king reachable by any opposing piece?"""
        king_sq = self._pos.king_square(color)
        return any(
            king_sq in self.pseudo_legal_moves(sq)
            for sq in self._board.occupied(color.opposite)
        )

    def king_would_be_in_check(self, color: Color, from_sq: Square, to_sq: Square) -> bool:
        """Would *color* be in check after the pseudo-legal move *from_sq* → *to_sq*?"""
        trial = self._pos.copy()
        trial.apply_move(Move(from_sq, to_sq))
        return MoveGenerator(trial).is_in_check(color)

    # -- Piece-specific generators (private) -------------------------------

    def _gen_pawn(self, sq: Square, color: Color) -> list[Square]:
        board = self._board
        forward, home_rank, ep_rank, last_rank = _PAWN_RANKS[color]
        file_idx = file_of(sq)
        rank_idx = rank_of(sq)
        moves: list[Square] = []

        # No promotion: a pawn on the far rank is stuck.
        if rank_idx == last_rank:
            return moves

        ahead_rank = rank_idx + forward
        one_step = make_square(file_idx, ahead_rank)
        if board.is_empty(one_step):
            moves.append(one_step)
            if rank_idx == home_rank:
                two_step = make_square(file_idx, ahead_rank + forward)
                if board.is_empty(two_step):
                    moves.append(two_step)

        for df in (-1, 1):
            cap_file = file_idx + df
            if not 0 <= cap_file < 8:
                continue
            cap_sq = make_square(cap_file, ahead_rank)
            target = board[cap_sq]
            if target is not None:
                if target.color != color:
                    moves.append(cap_sq)
            elif rank_idx == ep_rank and self._pos.en_passant == make_square(cap_file, rank_idx):
                moves.append(cap_sq)
        return moves

    def _gen_knight(self, sq: Square, color: Color) -> list[Square]:
        return self._gen_steps(sq, color, _KNIGHT_TARGETS[sq])

    def _gen_bishop(self, sq: Square, color: Color) -> list[Square]:
        return self._gen_sliding(sq, color, _BISHOP_RAYS[sq])

    def _gen_rook(self, sq: Square, color: Color) -> list[Square]:
        return self._gen_sliding(sq, color, _ROOK_RAYS[sq])

    def _gen_queen(self, sq: Square, color: Color) -> list[Square]:
        return self._gen_rook(sq, color) + self._gen_bishop(sq, color)

    def _gen_king(self, sq: Square, color: Color) -> list[Square]:
        moves = self._gen_steps(sq, color, _KING_TARGETS[sq])
        board = self._board
        for right, king_to, between in _CASTLES[color]:
            if self._pos.castling & right and all(board.is_empty(s) for s in between):
                moves.append(king_to)
        return moves

    def _gen_steps(
        self, sq: Square, color: Color, targets: tuple[Square, ...]
    ) -> list[Square]:
        board = self._board
        moves: list[Square] = []
        for to_sq in targets:
            target = board[to_sq]
            if target is None or target.color != color:
                moves.append(to_sq)
        return moves

    def _gen_sliding(
        self,
        sq: Square,
        color: Color,
        rays: tuple[tuple[Square, ...], ...],
    ) -> list[Square]:
        board = self._board
        moves: list[Square] = []
        for ray in rays:
            for to_sq in ray:
                target = board[to_sq]
                if target is None:
                    moves.append(to_sq)
                    continue
                if target.color != color:
                    moves.append(to_sq)
                break
        return moves


MoveGenerator._DISPATCH = {
    PieceType.PAWN: MoveGenerator._gen_pawn,
    PieceType.KNIGHT: MoveGenerator._gen_knight,
    PieceType.BISHOP: MoveGenerator._gen_bishop,
    PieceType.ROOK: MoveGenerator._gen_rook,
    PieceType.QUEEN: MoveGenerator._gen_queen,
    PieceType.KING: MoveGenerator._gen_king,
}
