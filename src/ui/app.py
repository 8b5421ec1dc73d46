"""
Presentation state machine.

Tracks which screen is showing (language list, difficulty menu or the
board), the player's selections and the current game session. Every
user intent is a method; intents that do not apply to the current
screen are ignored and return False.
"""
import logging
from enum import Enum, auto
from typing import Optional, Union

import numpy as np

from game import Difficulty, GameSession
from localization import Language, default_language, get_language


logger = logging.getLogger(__name__)


class Stage(Enum):
    """Screens of the game UI."""

    LANGUAGE = auto()
    DIFFICULTY = auto()
    PLAYING = auto()


class MinesweeperApp:
    """UI state for one player: stage, language, difficulty and session."""

    def __init__(
        self,
        language: Optional[Language] = None,
        difficulty: Union[str, Difficulty] = Difficulty.EASY,
        rng: Optional[np.random.Generator] = None,
    ) -> None:
        self.stage = Stage.LANGUAGE
        self.language = language or default_language()
        self.difficulty = Difficulty.from_key(difficulty)
        self.session = GameSession(self.difficulty, rng=rng)

    # ========================================================================
    # Navigation Intents
    # ========================================================================

    def select_language(self, language_id: str) -> bool:
        """
        Pick a language and move on to the difficulty menu.

        Raises:
            ValueError: If ``language_id`` is unknown.
        """
        if self.stage != Stage.LANGUAGE:
            return self._ignore("select_language")
        self.language = get_language(language_id)
        self._goto(Stage.DIFFICULTY)
        return True

    def select_difficulty(self, difficulty: Union[str, Difficulty]) -> bool:
        """
        Pick a difficulty and start a fresh game on it.

        Raises:
            ValueError: If ``difficulty`` is not a known key.
        """
        if self.stage != Stage.DIFFICULTY:
            return self._ignore("select_difficulty")
        self.difficulty = Difficulty.from_key(difficulty)
        self.session.reset(self.difficulty)
        self._goto(Stage.PLAYING)
        return True

    def back(self) -> bool:
        """Go back one screen."""
        if self.stage == Stage.PLAYING:
            self._goto(Stage.DIFFICULTY)
            return True
        if self.stage == Stage.DIFFICULTY:
            self._goto(Stage.LANGUAGE)
            return True
        return self._ignore("back")

    def main_menu(self) -> bool:
        """Leave the board for the difficulty menu."""
        if self.stage != Stage.PLAYING:
            return self._ignore("main_menu")
        self._goto(Stage.DIFFICULTY)
        return True

    # ========================================================================
    # Game Intents
    # ========================================================================

    def click(self, index: int) -> bool:
        """Reveal a cell on the board; ignored on the menus."""
        if self.stage != Stage.PLAYING:
            return self._ignore("click")
        return self.session.click(index)

    def flag(self, index: int) -> bool:
        """Toggle a flag on a cell; ignored on the menus."""
        if self.stage != Stage.PLAYING:
            return self._ignore("flag")
        return self.session.flag(index)

    def retry(self) -> bool:
        """Start a new game on the same difficulty."""
        if self.stage != Stage.PLAYING:
            return self._ignore("retry")
        self.session.reset(self.difficulty)
        return True

    # ========================================================================
    # Derived State
    # ========================================================================

    @property
    def show_result(self) -> bool:
        """Whether the win/lose overlay covers the board."""
        return self.stage == Stage.PLAYING and self.session.is_finished

    @property
    def result_label(self) -> Optional[str]:
        """Label key of the overlay headline, or None while playing."""
        if not self.show_result:
            return None
        return "win" if self.session.is_won else "lose"

    def _goto(self, stage: Stage) -> None:
        logger.debug("Stage %s -> %s", self.stage.name, stage.name)
        self.stage = stage

    def _ignore(self, intent: str) -> bool:
        logger.debug("Ignoring %s on %s screen", intent, self.stage.name)
        return False
