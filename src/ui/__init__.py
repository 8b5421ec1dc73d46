"""
Minesweeper UI module.

Provides the screen state machine, a text renderer and a terminal
command loop.
"""
from .app import MinesweeperApp, Stage
from .text import TextRenderer
from .console import ConsoleGame

__all__ = [
    "ConsoleGame",
    "MinesweeperApp",
    "Stage",
    "TextRenderer",
]
