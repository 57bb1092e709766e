"""PyQt6 user interface: board rendering and the game / trainer windows."""
