"""
Unit tests for Cell class.

Tests cover/flag behavior and observation conversion.
"""
import pytest
from minesweeper import Cell


# ============================================================================
# Cell Initialization Tests
# ============================================================================

class TestCellInitialization:
    """Test cell creation and default values."""

    def test_default_cell_is_not_mine(self) -> None:
        """New cell should not be a mine by default."""
        cell = Cell()
        assert cell.is_mine is False

    def test_default_cell_is_covered_and_unflagged(self) -> None:
        """New cell should be covered and carry no flag."""
        cell = Cell()
        assert cell.is_covered is True
        assert cell.is_flagged is False

    def test_default_cell_has_zero_adjacent_mines(self) -> None:
        """New cell should have 0 adjacent mines by default."""
        assert Cell().adjacent_mines == 0

    def test_cell_keeps_position(self) -> None:
        """Row and column are stored for display."""
        cell = Cell(row=3, col=7)
        assert (cell.row, cell.col) == (3, 7)


# ============================================================================
# Cell Uncover Tests
# ============================================================================

class TestCellUncover:
    """Test cell uncover behavior."""

    def test_uncover_covered_cell_returns_true(self, covered_cell: Cell) -> None:
        """Uncovering a covered cell should succeed."""
        assert covered_cell.uncover() is True
        assert covered_cell.is_covered is False

    def test_uncover_twice_returns_false(self, covered_cell: Cell) -> None:
        """A cell is uncovered at most once."""
        covered_cell.uncover()
        assert covered_cell.uncover() is False
        assert covered_cell.is_covered is False

    def test_uncover_flagged_cell_returns_false(self, covered_cell: Cell) -> None:
        """Cannot uncover a flagged cell."""
        covered_cell.toggle_flag()
        assert covered_cell.uncover() is False
        assert covered_cell.is_covered is True


# ============================================================================
# Cell Flag Tests
# ============================================================================

class TestCellFlag:
    """Test cell flagging behavior."""

    def test_flag_covered_cell(self, covered_cell: Cell) -> None:
        """Flagging a covered cell should succeed."""
        assert covered_cell.toggle_flag() is True
        assert covered_cell.is_flagged is True

    def test_unflag_clears_flag(self, covered_cell: Cell) -> None:
        """Toggling twice removes the flag."""
        covered_cell.toggle_flag()
        covered_cell.toggle_flag()
        assert covered_cell.is_flagged is False
        assert covered_cell.is_covered is True

    def test_flag_uncovered_cell_returns_false(self, covered_cell: Cell) -> None:
        """Cannot flag an uncovered cell."""
        covered_cell.uncover()
        assert covered_cell.toggle_flag() is False
        assert covered_cell.is_flagged is False


# ============================================================================
# Cell Observation Tests
# ============================================================================

class TestCellObservation:
    """Test cell observation codes."""

    def test_covered_cell_observation(self, covered_cell: Cell) -> None:
        """Covered cell should return -1."""
        assert covered_cell.to_observation() == -1

    def test_flagged_cell_observation(self, covered_cell: Cell) -> None:
        """Flagged cell should return -2."""
        covered_cell.toggle_flag()
        assert covered_cell.to_observation() == -2

    def test_flag_wins_over_uncovered_state(self, mine_cell: Cell) -> None:
        """A flag stays visible after the board is revealed."""
        mine_cell.toggle_flag()
        mine_cell.is_covered = False
        assert mine_cell.to_observation() == -2

    @pytest.mark.parametrize("count", range(0, 9))
    def test_uncovered_cell_observation_matches_count(self, count: int) -> None:
        """Uncovered cell returns its adjacent mine count."""
        cell = Cell(adjacent_mines=count)
        cell.uncover()
        assert cell.to_observation() == count

    def test_uncovered_mine_observation(self, mine_cell: Cell) -> None:
        """Uncovered mine should return 9."""
        mine_cell.uncover()
        assert mine_cell.to_observation() == 9

    def test_is_blank(self) -> None:
        """Only safe cells with zero count are blank."""
        assert Cell().is_blank is True
        assert Cell(adjacent_mines=1).is_blank is False
        assert Cell(is_mine=True).is_blank is False
