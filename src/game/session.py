"""
Game session for Minesweeper.

A session owns one board and the transient state of a single game:
whether the first click is still pending and whether the game was
lost or won.
"""
import logging
from enum import Enum, auto
from typing import Iterable, Optional, Union

import numpy as np

from .board import Board
from .cell import Cell
from .difficulty import BoardConfig, Difficulty, resolve_config


logger = logging.getLogger(__name__)


class GameState(Enum):
    """Possible states of a game."""

    SETUP = auto()
    PLAYING = auto()
    WON = auto()
    LOST = auto()


class GameSession:
    """
    Plays one game of Minesweeper at a time.

    Mine placement is deferred to the first click, which is therefore
    always safe. Lost and won are terminal until :meth:`reset`.
    """

    def __init__(
        self,
        difficulty: Union[str, Difficulty, BoardConfig] = Difficulty.EASY,
        rng: Optional[np.random.Generator] = None,
    ) -> None:
        """
        Args:
            difficulty: Difficulty, its key, or a custom BoardConfig.
            rng: Random source for mine placement (default: fresh generator).
        """
        self.rng = rng if rng is not None else np.random.default_rng()
        self.board = Board(resolve_config(difficulty), rng=self.rng)
        self.is_first_click = True
        self.is_over = False
        self.is_won = False

    def reset(
        self, difficulty: Union[str, Difficulty, BoardConfig, None] = None
    ) -> None:
        """
        Start a new game.

        Args:
            difficulty: Difficulty for the new game (default: keep current).

        Raises:
            ValueError: For an unknown difficulty key.
        """
        config = self.board.config if difficulty is None else resolve_config(difficulty)
        self.board = Board(config, rng=self.rng)
        self.is_first_click = True
        self.is_over = False
        self.is_won = False
        logger.debug(
            "New game: %dx%d with %d mines", config.size, config.size, config.num_mines
        )

    def load_layout(self, mine_indices: Iterable[int]) -> None:
        """
        Start a new game on a fixed mine layout.

        The first-click deferral is consumed, so the next click plays
        the layout as given.
        """
        self.reset()
        self.board.place_mines(mine_indices)
        self.is_first_click = False

    # ========================================================================
    # Player Actions
    # ========================================================================

    def click(self, index: int) -> bool:
        """
        Reveal the cell at ``index``.

        Returns:
            True if the click was played, False if it was ignored
            (game finished, cell off the board, revealed or flagged).
        """
        if self.is_over or self.is_won:
            return False
        cell = self.board.get_cell(index)
        if cell is None or not cell.is_hidden:
            return False

        if self.is_first_click:
            self.board.generate_mines(exclude_index=index)
            self.is_first_click = False

        if cell.is_mine:
            self.board.reveal_all_mines()
            self.is_over = True
            logger.info("Game lost: mine at %d", index)
            return True

        self.board.reveal(index)
        if self.board.all_safe_revealed:
            self.is_won = True
            logger.info("Game won")
        return True

    def flag(self, index: int) -> bool:
        """
        Toggle a flag on a cell.

        Returns:
            True if the flag was toggled, False otherwise.
        """
        if self.is_over or self.is_won:
            return False
        return self.board.toggle_flag(index)

    # ========================================================================
    # State Accessors
    # ========================================================================

    @property
    def config(self) -> BoardConfig:
        return self.board.config

    @property
    def state(self) -> GameState:
        """Current game state."""
        if self.is_over:
            return GameState.LOST
        if self.is_won:
            return GameState.WON
        if self.is_first_click:
            return GameState.SETUP
        return GameState.PLAYING

    @property
    def is_playing(self) -> bool:
        """Check if the game still accepts moves."""
        return not (self.is_over or self.is_won)

    @property
    def is_finished(self) -> bool:
        return self.is_over or self.is_won

    @property
    def mines_total(self) -> int:
        return self.board.config.num_mines

    @property
    def hidden_safe_count(self) -> int:
        return self.board.hidden_safe_count

    @property
    def flagged_count(self) -> int:
        return self.board.flagged_count

    def get_cell(self, index: int) -> Optional[Cell]:
        return self.board.get_cell(index)
