"""
Unit tests for Board.

Tests mine placement, neighbor lookup, flood-fill reveal, queries and
reset.
"""
import pytest
import numpy as np
from game import Board, BoardConfig, CellState


def brute_force_count(board: Board, index: int) -> int:
    """Reference neighbor count using explicit row/col arithmetic."""
    size = board.size
    row, col = index // size, index % size
    count = 0
    for r in range(size):
        for c in range(size):
            if (r, c) == (row, col):
                continue
            if abs(r - row) <= 1 and abs(c - col) <= 1:
                if board.get_cell(r * size + c).is_mine:
                    count += 1
    return count


def mine_indices(board: Board) -> list:
    return [i for i, cell in enumerate(board.cells) if cell.is_mine]


# ============================================================================
# Initialization Tests
# ============================================================================

class TestBoardInitialization:
    """Test board creation and initial state."""

    def test_cell_count_is_size_squared(self, default_board: Board) -> None:
        """Board holds size * size cells."""
        assert len(default_board.cells) == 100

    def test_new_board_all_hidden_without_mines(self, default_board: Board) -> None:
        """Mines are not placed until asked for."""
        assert all(cell.is_hidden for cell in default_board.cells)
        assert default_board.mine_total == 0
        assert default_board.mines_placed is False

    def test_index_position_round_trip(self, default_board: Board) -> None:
        """Index i sits at row i // size, column i % size."""
        assert default_board.position_of(23) == (2, 3)
        assert default_board.index_of(2, 3) == 23
        assert default_board.index_of(10, 0) is None
        assert default_board.index_of(0, -1) is None


# ============================================================================
# Mine Generation Tests
# ============================================================================

class TestGenerateMines:
    """Test random mine placement."""

    def test_places_exact_mine_count(self, default_board: Board) -> None:
        """Exactly num_mines cells become mines."""
        default_board.generate_mines(exclude_index=0)
        assert default_board.mine_total == 10
        assert default_board.mines_placed is True

    @pytest.mark.parametrize("seed", range(25))
    def test_excluded_index_never_mined(self, seed: int) -> None:
        """The excluded cell stays safe even on a crowded board."""
        board = Board(BoardConfig(3, 8), rng=np.random.default_rng(seed))
        board.generate_mines(exclude_index=4)
        assert board.get_cell(4).is_mine is False
        assert board.mine_total == 8

    def test_counts_match_brute_force_small(self, small_board: Board) -> None:
        """3x3 with one mine: every safe count matches the reference."""
        small_board.generate_mines(exclude_index=0)
        for index, cell in enumerate(small_board.cells):
            if not cell.is_mine:
                assert cell.neighbor_mine_count == brute_force_count(small_board, index)

    @pytest.mark.parametrize("seed", [0, 1, 2])
    def test_counts_match_brute_force_hard(self, seed: int) -> None:
        """Same check on a 20x20 board with 30 mines."""
        board = Board(BoardConfig(20, 30), rng=np.random.default_rng(seed))
        board.generate_mines(exclude_index=210)
        for index, cell in enumerate(board.cells):
            if not cell.is_mine:
                assert cell.neighbor_mine_count == brute_force_count(board, index)

    def test_easy_first_click_at_zero(self, default_board: Board) -> None:
        """10x10, 10 mines, click index 0: 10 mines and index 0 safe."""
        default_board.generate_mines(exclude_index=0)
        assert len(mine_indices(default_board)) == 10
        assert default_board.get_cell(0).is_mine is False

    def test_second_generation_keeps_layout(self, default_board: Board) -> None:
        """Generating again neither adds mines nor moves them."""
        default_board.generate_mines(exclude_index=0)
        layout = mine_indices(default_board)
        counts = [cell.neighbor_mine_count for cell in default_board.cells]

        default_board.generate_mines(exclude_index=50)

        assert default_board.mine_total == 10
        assert mine_indices(default_board) == layout
        assert [cell.neighbor_mine_count for cell in default_board.cells] == counts

    def test_generation_after_fixed_layout_is_ignored(self, small_board: Board) -> None:
        small_board.place_mines([4])
        small_board.generate_mines(exclude_index=0)
        assert mine_indices(small_board) == [4]

    def test_reset_allows_new_generation(self, default_board: Board) -> None:
        default_board.generate_mines(exclude_index=0)
        default_board.reset()
        default_board.generate_mines(exclude_index=0)
        assert default_board.mine_total == 10

    def test_same_seed_same_layout(self) -> None:
        """Seeded generators reproduce the layout."""
        first = Board(BoardConfig(10, 10), rng=np.random.default_rng(7))
        second = Board(BoardConfig(10, 10), rng=np.random.default_rng(7))
        first.generate_mines(5)
        second.generate_mines(5)
        assert mine_indices(first) == mine_indices(second)


class TestPlaceMines:
    """Test fixed mine layouts."""

    def test_places_given_layout(self, small_board: Board) -> None:
        small_board.place_mines([4])
        assert mine_indices(small_board) == [4]
        assert all(
            cell.neighbor_mine_count == 1
            for i, cell in enumerate(small_board.cells) if i != 4
        )

    def test_wrong_count_raises(self, small_board: Board) -> None:
        with pytest.raises(ValueError, match="Expected 1 mines"):
            small_board.place_mines([0, 1])

    def test_duplicates_raise(self) -> None:
        board = Board(BoardConfig(3, 2))
        with pytest.raises(ValueError, match="distinct"):
            board.place_mines([1, 1])

    def test_off_board_raises(self, small_board: Board) -> None:
        with pytest.raises(ValueError, match="off the board"):
            small_board.place_mines([9])


# ============================================================================
# Neighbor Tests
# ============================================================================

class TestNeighbors:
    """Test neighbor lookup."""

    def test_corner_has_three_neighbors(self, small_board: Board) -> None:
        assert small_board.neighbors(0) == [1, 3, 4]

    def test_edge_has_five_neighbors(self, small_board: Board) -> None:
        assert small_board.neighbors(1) == [0, 2, 3, 4, 5]

    def test_center_has_eight_in_row_major_order(self, small_board: Board) -> None:
        assert small_board.neighbors(4) == [0, 1, 2, 3, 5, 6, 7, 8]

    def test_no_wrap_around_rows(self, small_board: Board) -> None:
        """The right edge does not neighbor the next row's left edge."""
        assert 3 not in small_board.neighbors(2)
        assert small_board.neighbors(2) == [1, 4, 5]

    def test_single_cell_board_has_no_neighbors(self) -> None:
        assert Board(BoardConfig(1, 0)).neighbors(0) == []

    @pytest.mark.parametrize("index", [-1, 9, 100])
    def test_off_board_index_has_no_neighbors(
        self, small_board: Board, index: int
    ) -> None:
        assert small_board.neighbors(index) == []


# ============================================================================
# Reveal Tests
# ============================================================================

class TestReveal:
    """Test reveal and flood fill."""

    def test_numbered_cell_reveals_only_itself(self, small_board: Board) -> None:
        small_board.place_mines([4])
        assert small_board.reveal(0) == [0]
        assert sum(cell.is_revealed for cell in small_board.cells) == 1

    def test_empty_board_reveals_everything(self, empty_board: Board) -> None:
        """With no mines the flood reaches every cell."""
        revealed = empty_board.reveal(12)
        assert sorted(revealed) == list(range(25))
        assert all(cell.is_revealed for cell in empty_board.cells)

    def test_flood_stops_at_numbered_border(self) -> None:
        """A mined column walls the flood: zero region plus its border."""
        board = Board(BoardConfig(5, 5))
        board.place_mines([2, 7, 12, 17, 22])
        revealed = board.reveal(0)

        expected = {r * 5 + c for r in range(5) for c in (0, 1)}
        assert set(revealed) == expected
        for index in range(25):
            assert board.get_cell(index).is_revealed is (index in expected)

    def test_each_cell_revealed_once(self) -> None:
        """The reveal list has no repeats and never exceeds the board."""
        board = Board(BoardConfig(25, 1))
        board.place_mines([624])
        revealed = board.reveal(0)
        assert len(revealed) == len(set(revealed))
        assert len(revealed) == 624
        assert len(revealed) <= 25 * 25

    def test_reveal_revealed_cell_is_noop(self, empty_board: Board) -> None:
        empty_board.reveal(0)
        assert empty_board.reveal(0) == []

    @pytest.mark.parametrize("index", [-1, 25])
    def test_reveal_off_board_is_noop(self, empty_board: Board, index: int) -> None:
        assert empty_board.reveal(index) == []
        assert all(cell.is_hidden for cell in empty_board.cells)

    def test_flag_blocks_flood(self) -> None:
        """Flagged cells are skipped by the flood and stay flagged."""
        board = Board(BoardConfig(3, 0))
        board.toggle_flag(8)
        board.reveal(0)
        assert board.get_cell(8).state == CellState.FLAGGED
        assert board.hidden_safe_count == 0
        assert board.all_safe_revealed is False

    def test_reveal_all_mines(self, small_board: Board) -> None:
        small_board.place_mines([4])
        small_board.toggle_flag(4)
        small_board.reveal_all_mines()
        assert small_board.get_cell(4).is_revealed is True
        assert small_board.get_cell(0).is_hidden is True


# ============================================================================
# Query Tests
# ============================================================================

class TestQueries:
    """Test derived counts and observation."""

    def test_hidden_safe_count_excludes_mines_and_flags(
        self, small_board: Board
    ) -> None:
        small_board.place_mines([4])
        assert small_board.hidden_safe_count == 8
        small_board.toggle_flag(0)
        small_board.reveal(8)
        assert small_board.hidden_safe_count == 6

    def test_flagged_count(self, default_board: Board) -> None:
        default_board.toggle_flag(0)
        default_board.toggle_flag(1)
        default_board.toggle_flag(1)
        assert default_board.flagged_count == 1

    def test_toggle_flag_off_board(self, default_board: Board) -> None:
        assert default_board.toggle_flag(100) is False

    def test_observation_shape_and_codes(self, small_board: Board) -> None:
        small_board.place_mines([4])
        small_board.toggle_flag(8)
        small_board.reveal(0)
        obs = small_board.get_observation()
        assert obs.shape == (3, 3)
        assert obs.dtype == np.int8
        assert obs[0, 0] == 1
        assert obs[2, 2] == -2
        assert obs[1, 1] == -1

    def test_valid_actions_are_hidden_cells(self, small_board: Board) -> None:
        small_board.place_mines([4])
        small_board.reveal(0)
        small_board.toggle_flag(1)
        assert small_board.get_valid_actions() == [2, 3, 4, 5, 6, 7, 8]


# ============================================================================
# Reset Tests
# ============================================================================

class TestReset:
    """Test board reset."""

    def test_reset_clears_mines_and_state(self, default_board: Board) -> None:
        default_board.generate_mines(0)
        default_board.reveal(0)
        default_board.reset()
        assert default_board.mine_total == 0
        assert all(cell.is_hidden for cell in default_board.cells)
        assert all(cell.neighbor_mine_count == 0 for cell in default_board.cells)

    def test_reset_resizes(self, default_board: Board) -> None:
        default_board.reset(size=15, num_mines=20)
        assert len(default_board.cells) == 225
        assert default_board.config == BoardConfig(15, 20)

    def test_reset_rejects_too_many_mines(self, default_board: Board) -> None:
        """Invalid sizes fail fast and leave the board as it was."""
        with pytest.raises(ValueError, match="Too many mines"):
            default_board.reset(size=3, num_mines=9)
        assert default_board.config == BoardConfig(10, 10)
        assert len(default_board.cells) == 100
