"""Visual theme constants and QSS styles for the chess trainer."""

from __future__ import annotations

from dataclasses import dataclass

from PyQt6.QtGui import QColor


@dataclass(frozen=True)
class BoardTheme:
    """Colour scheme for the chessboard."""

    light_square: QColor
    dark_square: QColor
    highlight: QColor  # selected piece / last move
    hint: QColor  # legal move dots and capture rings
    highlight_check: QColor  # king in check
    coord_light: QColor  # coordinate text on dark squares
    coord_dark: QColor  # coordinate text on light squares
    white_piece: QColor
    black_piece: QColor

    @classmethod
    def default(cls) -> BoardTheme:
        return cls(
            light_square=QColor(240, 217, 181),  # tan
            dark_square=QColor(181, 136, 99),  # brown
            highlight=QColor(255, 255, 0, 100),  # yellow transparent
            hint=QColor(0, 0, 0, 50),
            highlight_check=QColor(255, 0, 0, 120),  # red transparent
            coord_light=QColor(240, 217, 181),
            coord_dark=QColor(181, 136, 99),
            white_piece=QColor(255, 255, 255),
            black_piece=QColor(20, 20, 20),
        )

    @classmethod
    def blue(cls) -> BoardTheme:
        return cls(
            light_square=QColor(222, 227, 230),
            dark_square=QColor(140, 162, 173),
            highlight=QColor(255, 255, 0, 100),
            hint=QColor(0, 0, 0, 50),
            highlight_check=QColor(255, 0, 0, 120),
            coord_light=QColor(222, 227, 230),
            coord_dark=QColor(140, 162, 173),
            white_piece=QColor(255, 255, 255),
            black_piece=QColor(20, 20, 20),
        )

    @classmethod
    def green(cls) -> BoardTheme:
        return cls(
            light_square=QColor(236, 238, 220),
            dark_square=QColor(112, 149, 120),
            highlight=QColor(255, 255, 0, 100),
            hint=QColor(0, 0, 0, 50),
            highlight_check=QColor(255, 0, 0, 120),
            coord_light=QColor(236, 238, 220),
            coord_dark=QColor(112, 149, 120),
            white_piece=QColor(255, 255, 255),
            black_piece=QColor(20, 20, 20),
        )

    @classmethod
    def named(cls, name: str) -> BoardTheme:
        """Look up a preset by its settings name."""
        presets = {
            "Classic": cls.default,
            "Blue": cls.blue,
            "Green": cls.green,
        }
        try:
            return presets[name]()
        except KeyError:
            raise ValueError(f"Unknown board theme: {name!r}") from None


APP_STYLE = """
QMainWindow, QWidget {
    background-color: #262421;
    color: #e0e0e0;
}
QLabel#statusLabel {
    font-size: 16px;
    padding: 6px;
}
QPushButton {
    background-color: #3c3a37;
    border: 1px solid #55524e;
    border-radius: 4px;
    padding: 6px 14px;
}
QPushButton:hover {
    background-color: #4a4744;
}
"""
