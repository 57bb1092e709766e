"""User-configurable application settings."""

from __future__ import annotations

from dataclasses import dataclass

MODES: tuple[str, ...] = ("game", "squares")
THEMES: tuple[str, ...] = ("Classic", "Blue", "Green")


@dataclass
class AppSettings:
    """All user-configurable settings."""

    # General
    mode: str = "game"  # "game" or "squares"

    # Game
    start_fen: str | None = None
    legal_only: bool = True  # False: pseudo-legal "free play"

    # Board
    board_theme: str = "Classic"
    show_coordinates: bool = True
    show_hints: bool = True
    flipped: bool = False
