"""
Minesweeper game module.

Provides the board engine: cells, board configuration, mine placement,
flood-fill reveal and the game session state machine.
"""
from .cell import Cell, CellState
from .difficulty import BoardConfig, Difficulty, resolve_config
from .board import Board
from .session import GameSession, GameState
from .environment import MinesweeperEnv

__all__ = [
    "Cell",
    "CellState",
    "Board",
    "BoardConfig",
    "Difficulty",
    "GameSession",
    "GameState",
    "MinesweeperEnv",
    "resolve_config",
]
