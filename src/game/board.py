"""
Board module for Minesweeper game.

Implements the flat cell grid with mine placement, neighbor lookup
and flood-fill revealing. Cells are addressed by a single index;
index ``i`` sits at row ``i // size`` and column ``i % size``.
"""
import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Tuple

import numpy as np

from .cell import Cell, CellState
from .difficulty import BoardConfig


logger = logging.getLogger(__name__)


# ============================================================================
# Board Class
# ============================================================================

@dataclass
class Board:
    """
    Minesweeper game board.

    Owns ``size * size`` cells. Mines are not placed on creation; the
    session calls :meth:`generate_mines` on the first click so that the
    clicked cell is never a mine.
    """

    config: BoardConfig = field(default_factory=BoardConfig)
    rng: np.random.Generator = field(
        default_factory=np.random.default_rng, repr=False
    )
    _cells: List[Cell] = field(default_factory=list, repr=False)
    _mines_placed: bool = False

    def __post_init__(self) -> None:
        """Initialize the cells after dataclass creation."""
        self._init_cells()

    # ========================================================================
    # Initialization (Low-level)
    # ========================================================================

    def _init_cells(self) -> None:
        """Create a fresh sequence of hidden, mine-free cells."""
        self._cells = [Cell() for _ in range(self.config.total_cells)]
        self._mines_placed = False

    def reset(
        self, size: Optional[int] = None, num_mines: Optional[int] = None
    ) -> None:
        """
        Reinitialize the board, optionally with new dimensions.

        Args:
            size: New board size (default: keep current).
            num_mines: New mine count (default: keep current).

        Raises:
            ValueError: If the combination cannot hold the mines. The
                board is left untouched in that case.
        """
        self.config = BoardConfig(
            size=self.config.size if size is None else size,
            num_mines=self.config.num_mines if num_mines is None else num_mines,
        )
        self._init_cells()

    # ========================================================================
    # Mine Placement
    # ========================================================================

    def generate_mines(self, exclude_index: int) -> None:
        """
        Place mines at random, never on ``exclude_index``.

        Draws uniformly random indices and keeps the ones that are
        neither excluded nor already mined until the configured count
        is reached. Terminates because the config guarantees at least
        one cell more than there are mines.

        Does nothing once mines are on the board; the layout is fixed
        until :meth:`reset`.

        Args:
            exclude_index: Cell that must stay mine-free (the first click).
        """
        if self._mines_placed:
            logger.debug(
                "Mines already placed, ignoring generate_mines(%d)", exclude_index
            )
            return

        total = self.config.total_cells
        placed = 0
        attempts = 0
        while placed < self.config.num_mines:
            attempts += 1
            index = int(self.rng.integers(0, total))
            if index != exclude_index and not self._cells[index].is_mine:
                self._cells[index].is_mine = True
                placed += 1

        self._calculate_neighbor_counts()
        self._mines_placed = True
        logger.debug(
            "Placed %d mines on %dx%d board in %d draws (excluded %d)",
            placed, self.config.size, self.config.size, attempts, exclude_index,
        )

    def place_mines(self, indices: Iterable[int]) -> None:
        """
        Place mines at fixed positions.

        Args:
            indices: Exactly ``num_mines`` distinct, in-range indices.

        Raises:
            ValueError: If the layout does not fit the configuration.
        """
        mine_indices = list(indices)
        if len(set(mine_indices)) != len(mine_indices):
            raise ValueError("Mine positions must be distinct")
        if len(mine_indices) != self.config.num_mines:
            raise ValueError(
                f"Expected {self.config.num_mines} mines, got {len(mine_indices)}"
            )
        for index in mine_indices:
            if not self.is_valid_index(index):
                raise ValueError(f"Mine position {index} is off the board")

        for cell in self._cells:
            cell.is_mine = False
            cell.neighbor_mine_count = 0
        for index in mine_indices:
            self._cells[index].is_mine = True

        self._calculate_neighbor_counts()
        self._mines_placed = True

    def _calculate_neighbor_counts(self) -> None:
        """Calculate neighbor mine counts for all safe cells."""
        for index, cell in enumerate(self._cells):
            if not cell.is_mine:
                cell.neighbor_mine_count = self._count_neighbor_mines(index)

    def _count_neighbor_mines(self, index: int) -> int:
        return sum(1 for n in self.neighbors(index) if self._cells[n].is_mine)

    # ========================================================================
    # Neighbor Utilities
    # ========================================================================

    def neighbors(self, index: int) -> List[int]:
        """
        Get valid neighboring cell indices.

        Args:
            index: Index of the center cell.

        Returns:
            Indices of the up-to-8 adjacent cells in row-major order;
            empty if ``index`` is off the board.
        """
        if not self.is_valid_index(index):
            return []
        size = self.config.size
        row, col = divmod(index, size)
        result = []
        for delta_row in (-1, 0, 1):
            for delta_col in (-1, 0, 1):
                if delta_row == 0 and delta_col == 0:
                    continue
                new_row = row + delta_row
                new_col = col + delta_col
                if 0 <= new_row < size and 0 <= new_col < size:
                    result.append(new_row * size + new_col)
        return result

    def is_valid_index(self, index: int) -> bool:
        """Check if index addresses a cell on this board."""
        return 0 <= index < self.config.total_cells

    def index_of(self, row: int, col: int) -> Optional[int]:
        """Convert (row, col) to a flat index, or None if off the board."""
        size = self.config.size
        if 0 <= row < size and 0 <= col < size:
            return row * size + col
        return None

    def position_of(self, index: int) -> Tuple[int, int]:
        """Convert a flat index to (row, col)."""
        return divmod(index, self.config.size)

    # ========================================================================
    # Actions
    # ========================================================================

    def reveal(self, index: int) -> List[int]:
        """
        Reveal a cell, flooding outward through zero-count cells.

        Only hidden cells are revealed, so flags stop the flood and no
        cell is visited twice.

        Args:
            index: Cell to reveal.

        Returns:
            Indices revealed by this call, in reveal order. Empty when
            the index is off the board or the cell is not hidden.
        """
        if not self.is_valid_index(index) or not self._cells[index].is_hidden:
            return []

        revealed = []
        stack = [index]
        while stack:
            current = stack.pop()
            cell = self._cells[current]
            if not cell.reveal():
                continue
            revealed.append(current)
            if cell.neighbor_mine_count == 0 and not cell.is_mine:
                stack.extend(
                    n for n in self.neighbors(current)
                    if self._cells[n].is_hidden
                )

        if len(revealed) > 1:
            logger.debug("Flood fill from %d revealed %d cells", index, len(revealed))
        return revealed

    def reveal_all_mines(self) -> None:
        """Show every mine, including flagged ones."""
        for cell in self._cells:
            if cell.is_mine:
                cell.state = CellState.REVEALED

    def toggle_flag(self, index: int) -> bool:
        """
        Toggle flag on a cell.

        Returns:
            True if flag was toggled, False otherwise.
        """
        if not self.is_valid_index(index):
            return False
        return self._cells[index].toggle_flag()

    # ========================================================================
    # State Accessors
    # ========================================================================

    @property
    def size(self) -> int:
        return self.config.size

    @property
    def cells(self) -> Tuple[Cell, ...]:
        """Read-only view of the cell sequence."""
        return tuple(self._cells)

    @property
    def mines_placed(self) -> bool:
        return self._mines_placed

    @property
    def mine_total(self) -> int:
        """Number of mines actually on the board."""
        return sum(1 for cell in self._cells if cell.is_mine)

    @property
    def hidden_safe_count(self) -> int:
        """Number of hidden (not flagged) cells that are not mines."""
        return sum(
            1 for cell in self._cells if cell.is_hidden and not cell.is_mine
        )

    @property
    def flagged_count(self) -> int:
        return sum(1 for cell in self._cells if cell.is_flagged)

    @property
    def all_safe_revealed(self) -> bool:
        """Check if every non-mine cell is revealed."""
        return all(cell.is_revealed for cell in self._cells if not cell.is_mine)

    def get_cell(self, index: int) -> Optional[Cell]:
        """Get cell at index, or None if invalid."""
        if not self.is_valid_index(index):
            return None
        return self._cells[index]

    def get_observation(self) -> np.ndarray:
        """
        Get the board as the player sees it.

        Returns:
            ``(size, size)`` int8 array where:
                -1 = hidden
                -2 = flagged
                0-8 = revealed with neighbor count
                9 = revealed mine
        """
        flat = np.fromiter(
            (cell.to_observation() for cell in self._cells),
            dtype=np.int8,
            count=len(self._cells),
        )
        return flat.reshape(self.config.size, self.config.size)

    def get_valid_actions(self) -> List[int]:
        """Indices of hidden cells that can still be clicked."""
        return [i for i, cell in enumerate(self._cells) if cell.is_hidden]
