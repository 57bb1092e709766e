"""Move and move-result value objects."""

from __future__ import annotations

from dataclasses import dataclass

from chesstrainer.core.enums import MoveStatus
from chesstrainer.core.types import Square, parse_square, square_name

REJECTION_TEXT: dict[MoveStatus, str] = {
    MoveStatus.NOT_PSEUDO_LEGAL: "pseudo legal",
    MoveStatus.NOT_LEGAL: "legal",
}


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable value object: a piece travelling from one square to another."""

    from_sq: Square
    to_sq: Square

    def __str__(self) -> str:
        return f"{square_name(self.from_sq)}{square_name(self.to_sq)}"

    @classmethod
    def from_uci(cls, text: str) -> Move:
        """Parse coordinate notation, e.g. 'g1f3'."""
        if len(text) != 4:
            raise ValueError(f"Invalid move text: {text!r}")
        return cls(parse_square(text[:2]), parse_square(text[2:]))


@dataclass(frozen=True, slots=True)
class MoveResult:
    """What happened to a move-execution request.

    Truthy only when the move was applied, so callers can write
    ``if position.play_legal_move(a, b): ...``.
    """

    move: Move
    status: MoveStatus

    @property
    def ok(self) -> bool:
        return self.status == MoveStatus.APPLIED

    def __bool__(self) -> bool:
        return self.ok

    @property
    def message(self) -> str:
        frm = square_name(self.move.from_sq)
        to = square_name(self.move.to_sq)
        if self.ok:
            return f"Moved from {frm} to {to}."
        return f"Move from {frm} to {to} is not {REJECTION_TEXT[self.status]}."
