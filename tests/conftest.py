"""
Pytest configuration and shared fixtures.
"""
import pytest
import sys
from pathlib import Path

import numpy as np

# Add src (packages) and the repo root (entry scripts) to path for imports
ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(ROOT))
sys.path.insert(0, str(ROOT / "src"))

from game import Board, BoardConfig, Cell, GameSession
from localization import get_language
from ui import MinesweeperApp


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def rng() -> np.random.Generator:
    """Seeded random source for reproducible mine layouts."""
    return np.random.default_rng(1234)


@pytest.fixture
def default_board(rng: np.random.Generator) -> Board:
    """Create an easy 10x10 board with 10 mines."""
    return Board(BoardConfig(10, 10), rng=rng)


@pytest.fixture
def small_board(rng: np.random.Generator) -> Board:
    """Create a small 3x3 board with 1 mine for testing."""
    return Board(BoardConfig(3, 1), rng=rng)


@pytest.fixture
def empty_board() -> Board:
    """Create a board with no mines for cascade testing."""
    return Board(BoardConfig(5, 0))


# ============================================================================
# Session Fixtures
# ============================================================================

@pytest.fixture
def session(rng: np.random.Generator) -> GameSession:
    """Easy session with seeded mine placement."""
    return GameSession("easy", rng=rng)


@pytest.fixture
def tiny_session() -> GameSession:
    """2x2 session with a single mine in the top-left corner."""
    game = GameSession(BoardConfig(2, 1))
    game.load_layout([0])
    return game


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def hidden_cell() -> Cell:
    """Create a hidden cell."""
    return Cell()


@pytest.fixture
def mine_cell() -> Cell:
    """Create a cell containing a mine."""
    return Cell(is_mine=True)


# ============================================================================
# UI Fixtures
# ============================================================================

@pytest.fixture
def app(rng: np.random.Generator) -> MinesweeperApp:
    """App on the language screen with seeded mine placement."""
    return MinesweeperApp(rng=rng)


@pytest.fixture
def english_app(app: MinesweeperApp) -> MinesweeperApp:
    """App on an easy board in English."""
    app.select_language("en")
    app.select_difficulty("easy")
    return app


@pytest.fixture
def english():
    return get_language("en")
