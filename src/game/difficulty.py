"""
Board configuration and the fixed difficulty table.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Union


# ============================================================================
# Board Configuration
# ============================================================================

@dataclass(frozen=True)
class BoardConfig:
    """
    Configuration for a square Minesweeper board.

    Attributes:
        size: Number of rows (and columns).
        num_mines: Total mines to place.
    """

    size: int = 10
    num_mines: int = 10

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.size < 1:
            raise ValueError("Board size must be positive")
        if self.num_mines < 0:
            raise ValueError("Number of mines cannot be negative")
        max_mines = self.size * self.size - 1
        if self.num_mines > max_mines:
            raise ValueError(f"Too many mines (max {max_mines})")

    @property
    def total_cells(self) -> int:
        return self.size * self.size

    @property
    def safe_cells(self) -> int:
        return self.total_cells - self.num_mines


# ============================================================================
# Difficulty Presets
# ============================================================================

class Difficulty(Enum):
    """Preset difficulty levels, keyed by a stable id."""

    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"
    INSANE = "insane"

    @property
    def config(self) -> BoardConfig:
        return DIFFICULTY_CONFIGS[self]

    @property
    def color(self) -> str:
        """Accent colour name used by renderers."""
        return DIFFICULTY_COLORS[self]

    @classmethod
    def from_key(cls, key: Union[str, "Difficulty"]) -> "Difficulty":
        """
        Look up a difficulty by key.

        Args:
            key: A Difficulty, or its key such as "easy" (case-insensitive).

        Returns:
            The matching Difficulty.

        Raises:
            ValueError: If the key names no difficulty.
        """
        if isinstance(key, cls):
            return key
        try:
            return cls(str(key).strip().lower())
        except ValueError:
            known = ", ".join(d.value for d in cls)
            raise ValueError(
                f"Unknown difficulty {key!r} (expected one of: {known})"
            ) from None


DIFFICULTY_CONFIGS = {
    Difficulty.EASY: BoardConfig(10, 10),
    Difficulty.MEDIUM: BoardConfig(15, 20),
    Difficulty.HARD: BoardConfig(20, 30),
    Difficulty.INSANE: BoardConfig(25, 50),
}

DIFFICULTY_COLORS = {
    Difficulty.EASY: "green",
    Difficulty.MEDIUM: "orange",
    Difficulty.HARD: "red",
    Difficulty.INSANE: "purple",
}


def resolve_config(
    difficulty: Union[str, Difficulty, BoardConfig]
) -> BoardConfig:
    """Turn a difficulty key, Difficulty or BoardConfig into a BoardConfig."""
    if isinstance(difficulty, BoardConfig):
        return difficulty
    return Difficulty.from_key(difficulty).config
