"""Themes and stylesheets."""

from chesstrainer.ui.styles.theme import APP_STYLE, BoardTheme

__all__ = ["APP_STYLE", "BoardTheme"]
