"""
Cell module for Minesweeper game.

A cell is a passive record owned by the board: whether it holds a mine,
how many of its neighbors do, and whether the player has revealed or
flagged it.
"""
from enum import Enum, auto
from dataclasses import dataclass


# ============================================================================
# Constants
# ============================================================================

class CellState(Enum):
    """Possible visual states of a cell."""

    HIDDEN = auto()
    REVEALED = auto()
    FLAGGED = auto()


# Observation codes shared by the board array and the renderers
HIDDEN_CODE = -1
FLAGGED_CODE = -2
MINE_CODE = 9

# One-character text for each observation code; counts 1-8 print as digits
CELL_SYMBOLS = {
    HIDDEN_CODE: ".",
    FLAGGED_CODE: "F",
    MINE_CODE: "*",
    0: " ",
}

# Flagging only moves between these two states
_FLAG_TOGGLE = {
    CellState.HIDDEN: CellState.FLAGGED,
    CellState.FLAGGED: CellState.HIDDEN,
}


def cell_symbol(code: int) -> str:
    """Text symbol for an observation code."""
    return CELL_SYMBOLS.get(code, str(code))


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass
class Cell:
    """
    One square of the grid.

    Attributes:
        is_mine: True when the square hides a mine.
        neighbor_mine_count: Mines among the up-to-8 surrounding squares.
        state: What the player currently sees.
    """

    is_mine: bool = False
    neighbor_mine_count: int = 0
    state: CellState = CellState.HIDDEN

    def reveal(self) -> bool:
        """
        Uncover the square.

        Returns:
            False for a square that is already open or carries a flag.
        """
        if not self.is_hidden:
            return False
        self.state = CellState.REVEALED
        return True

    def toggle_flag(self) -> bool:
        """Flag a hidden square or unflag a flagged one; open squares refuse."""
        next_state = _FLAG_TOGGLE.get(self.state)
        if next_state is None:
            return False
        self.state = next_state
        return True

    @property
    def is_hidden(self) -> bool:
        return self.state is CellState.HIDDEN

    @property
    def is_revealed(self) -> bool:
        return self.state is CellState.REVEALED

    @property
    def is_flagged(self) -> bool:
        return self.state is CellState.FLAGGED

    def to_observation(self) -> int:
        """
        Encode the square for the observation array.

        Hidden and flagged squares give HIDDEN_CODE and FLAGGED_CODE, an
        open mine gives MINE_CODE and any other open square its count.
        """
        if self.is_hidden:
            return HIDDEN_CODE
        if self.is_flagged:
            return FLAGGED_CODE
        return MINE_CODE if self.is_mine else self.neighbor_mine_count
