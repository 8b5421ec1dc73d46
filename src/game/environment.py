"""
Gymnasium environment wrapper for Minesweeper.

Drives a GameSession through the standard Env interface so the game
can be played by scripts as well as by people.
"""
from typing import Any, Dict, Optional, SupportsFloat, Tuple, Union

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .cell import FLAGGED_CODE, MINE_CODE, cell_symbol
from .difficulty import BoardConfig, Difficulty, resolve_config
from .session import GameSession


# ============================================================================
# Minesweeper Environment
# ============================================================================

class MinesweeperEnv(gym.Env):
    """
    Gymnasium environment for Minesweeper.

    Observation:
        2D array where:
        - -1 = hidden cell
        - -2 = flagged cell
        - 0-8 = revealed cell with neighbor mine count
        - 9 = revealed mine

    Actions:
        Discrete action space of size ``size * size``; action i clicks
        the cell with flat index i.

    Rewards:
        - +1 for revealing a safe cell
        - +10 for winning the game
        - -10 for hitting a mine
        - -0.1 for invalid action (already revealed/flagged)
    """

    metadata = {"render_modes": ["human", "ansi"], "render_fps": 4}

    def __init__(
        self,
        difficulty: Union[str, Difficulty, BoardConfig] = Difficulty.EASY,
        render_mode: Optional[str] = None,
    ) -> None:
        """
        Initialize the Minesweeper environment.

        Args:
            difficulty: Difficulty, its key, or a custom BoardConfig.
            render_mode: How to render the environment.
        """
        super().__init__()

        self.config = resolve_config(difficulty)
        self.session = GameSession(self.config, rng=self.np_random)
        self.render_mode = render_mode

        size = self.config.size
        self.observation_space = spaces.Box(
            low=FLAGGED_CODE,
            high=MINE_CODE,
            shape=(size, size),
            dtype=np.int8,
        )
        self.action_space = spaces.Discrete(self.config.total_cells)

        self._steps = 0

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Tuple[np.ndarray, Dict[str, Any]]:
        """
        Reset the environment for a new game.

        Args:
            seed: Random seed for mine placement.
            options: Additional options (unused).

        Returns:
            Tuple of (observation, info dict).
        """
        super().reset(seed=seed)
        self.session.rng = self.np_random
        self.session.reset(self.config)
        self._steps = 0

        return self.session.board.get_observation(), self._get_info()

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Click one cell.

        Args:
            action: Flat cell index.

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
        """
        self._steps += 1
        reward = self._calculate_reward(int(action))

        observation = self.session.board.get_observation()
        terminated = self.session.is_finished
        truncated = False

        if self.render_mode == "human":
            self.render()

        return observation, reward, terminated, truncated, self._get_info()

    def _calculate_reward(self, action: int) -> float:
        """Play the click and score its outcome."""
        if not self.session.click(action):
            return -0.1
        if self.session.is_won:
            return 10.0
        if self.session.is_over:
            return -10.0
        return 1.0

    def _get_info(self) -> Dict[str, Any]:
        """Get info dictionary for current state."""
        board = self.session.board
        return {
            "steps": self._steps,
            "revealed": sum(1 for cell in board.cells if cell.is_revealed),
            "total_safe": self.config.safe_cells,
            "game_state": self.session.state.name,
            "valid_actions": len(board.get_valid_actions()),
        }

    def render(self) -> Optional[str]:
        """Return the board text in "ansi" mode, print it in "human" mode."""
        if self.render_mode is None:
            return None
        text = self._render_ansi()
        if self.render_mode == "ansi":
            return text
        print(text)
        return None

    def _render_ansi(self) -> str:
        # Each symbol is followed by a space, trailing one included
        return "\n".join(
            "".join(f"{cell_symbol(int(code))} " for code in row)
            for row in self.session.board.get_observation()
        )

    def get_action_mask(self) -> np.ndarray:
        """Boolean vector over actions, True where the cell is still hidden."""
        hidden = [cell.is_hidden for cell in self.session.board.cells]
        return np.array(hidden, dtype=bool)
