"""
Plain-text rendering of every UI screen.
"""
from typing import List, Optional, Sequence

from game import Difficulty
from game.cell import cell_symbol
from localization import LANGUAGES, Language

from .app import MinesweeperApp, Stage


class TextRenderer:
    """
    Renders a MinesweeperApp as text.

    Args:
        languages: Languages offered on the first screen.
    """

    def __init__(self, languages: Sequence[Language] = LANGUAGES) -> None:
        self.languages = languages

    def render(self, app: MinesweeperApp) -> str:
        """Render whatever screen the app is showing."""
        if app.stage == Stage.LANGUAGE:
            return self.render_language_menu()
        if app.stage == Stage.DIFFICULTY:
            return self.render_difficulty_menu(app.language, app.difficulty)
        text = self.render_board(app)
        if app.show_result:
            text += "\n\n" + self.render_result(app)
        return text

    def render_language_menu(self) -> str:
        lines = ["SELECT LANGUAGE", ""]
        width = len(str(len(self.languages)))
        for number, language in enumerate(self.languages, start=1):
            lines.append(
                f"{number:>{width}}. {language.flag} {language.name} [{language.id}]"
            )
        return "\n".join(lines)

    def render_difficulty_menu(
        self, language: Language, current: Optional[Difficulty] = None
    ) -> str:
        """List the presets; ``current`` is marked and picked by Enter."""
        lines = [language.name, language.label("select_diff"), ""]
        for number, difficulty in enumerate(Difficulty, start=1):
            config = difficulty.config
            lines.append(
                f"{number}. {language.difficulty_name(difficulty)}"
                f"  {config.size}x{config.size} | {config.num_mines} Mines"
                + (" <" if difficulty is current else "")
            )
        lines.append("")
        lines.append(f"b. {language.label('back')}")
        return "\n".join(lines)

    def render_board(self, app: MinesweeperApp) -> str:
        """Header, counters and the grid with row/column numbers."""
        session = app.session
        language = app.language
        lines = [
            f"{language.title} - {language.difficulty_name(app.difficulty)}",
            f"Mines: {session.mines_total}   "
            f"Hidden: {session.hidden_safe_count}   "
            f"Flags: {session.flagged_count}",
            "",
        ]
        lines.extend(self.render_grid(app))
        return "\n".join(lines)

    def render_grid(self, app: MinesweeperApp) -> List[str]:
        obs = app.session.board.get_observation()
        size = obs.shape[0]
        width = len(str(size - 1))

        header = " " * (width + 1) + " ".join(
            f"{col:>{width}}" for col in range(size)
        )
        rows = [header]
        for row in range(size):
            symbols = " ".join(
                f"{cell_symbol(int(val)):>{width}}" for val in obs[row]
            )
            rows.append(f"{row:>{width}} {symbols}")
        return rows

    def render_result(self, app: MinesweeperApp) -> str:
        language = app.language
        headline = language.label(app.result_label)
        return "\n".join([
            f"*** {headline} ***",
            f"r. {language.label('retry')}   m. {language.label('menu')}",
        ])
