"""Chess trainer: a rules engine plus a small PyQt6 board to play on."""

__version__ = "0.1.0"
