"""
Interactive terminal front end.

Reads one command per line and turns it into an app intent:

    Language screen:    NUMBER or LANGUAGE_ID
    Difficulty screen:  NUMBER or KEY (easy, medium, ...), b = back,
                        empty line = the marked difficulty
    Board:              c ROW COL = click, f ROW COL = flag,
                        r = retry, m = main menu, b = back
    Anywhere:           q = quit
"""
import logging
from typing import Callable, List, Optional

from game import Difficulty

from .app import MinesweeperApp, Stage
from .text import TextRenderer


logger = logging.getLogger(__name__)

QUIT_COMMANDS = ("q", "quit", "exit")


class ConsoleGame:
    """
    Command loop around a MinesweeperApp.

    Args:
        app: The UI state to drive.
        input_fn: Returns the next line; raises EOFError when input ends.
        output: Receives rendered screens and messages.
        renderer: Text renderer (default: all languages).
    """

    def __init__(
        self,
        app: MinesweeperApp,
        input_fn: Callable[[str], str] = input,
        output: Callable[[str], None] = print,
        renderer: Optional[TextRenderer] = None,
    ) -> None:
        self.app = app
        self.input_fn = input_fn
        self.output = output
        self.renderer = renderer or TextRenderer()

    def run(self) -> None:
        """Render, read and dispatch until quit or end of input."""
        while True:
            self.output(self.renderer.render(self.app))
            try:
                line = self.input_fn("> ")
            except EOFError:
                break
            if not self.handle(line):
                break

    def handle(self, line: str) -> bool:
        """
        Dispatch one command line.

        Returns:
            False when the player asked to quit, True otherwise.
        """
        words = line.strip().split()
        if not words:
            # Enter takes the marked difficulty
            if self.app.stage == Stage.DIFFICULTY:
                self.app.select_difficulty(self.app.difficulty)
            return True
        command = words[0].lower()
        if command in QUIT_COMMANDS:
            return False

        try:
            if self.app.stage == Stage.LANGUAGE:
                self._handle_language(command)
            elif self.app.stage == Stage.DIFFICULTY:
                self._handle_difficulty(command)
            else:
                self._handle_board(command, words[1:])
        except ValueError as exc:
            self.output(str(exc))
        return True

    def _handle_language(self, command: str) -> None:
        languages = self.renderer.languages
        if command.isdigit():
            number = int(command)
            if not 1 <= number <= len(languages):
                raise ValueError(f"Choose a number from 1 to {len(languages)}")
            command = languages[number - 1].id
        self.app.select_language(command)

    def _handle_difficulty(self, command: str) -> None:
        if command == "b":
            self.app.back()
            return
        if command.isdigit():
            choices = list(Difficulty)
            number = int(command)
            if not 1 <= number <= len(choices):
                raise ValueError(f"Choose a number from 1 to {len(choices)}")
            command = choices[number - 1].value
        self.app.select_difficulty(command)

    def _handle_board(self, command: str, args: List[str]) -> None:
        if command == "r":
            self.app.retry()
        elif command == "m":
            self.app.main_menu()
        elif command == "b":
            self.app.back()
        elif command in ("c", "f"):
            index = self._parse_cell(args)
            played = self.app.click(index) if command == "c" else self.app.flag(index)
            if not played:
                logger.debug("Command %r had no effect", command)
        else:
            raise ValueError(f"Unknown command: {command}")

    def _parse_cell(self, args: List[str]) -> int:
        if len(args) != 2:
            raise ValueError("Expected ROW COL")
        try:
            row, col = int(args[0]), int(args[1])
        except ValueError:
            raise ValueError("ROW and COL must be numbers") from None
        index = self.app.session.board.index_of(row, col)
        if index is None:
            size = self.app.session.config.size
            raise ValueError(f"ROW and COL must be between 0 and {size - 1}")
        return index
