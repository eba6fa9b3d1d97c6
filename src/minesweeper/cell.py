"""
Cell module for Minesweeper game.

Represents individual cells on the game board with their cover and flag
state and content (mine/number).
"""
from dataclasses import dataclass


# ============================================================================
# Constants
# ============================================================================

# Observation codes shared with Board.get_observation()
OBS_COVERED = -1
OBS_FLAGGED = -2
OBS_MINE = 9


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass
class Cell:
    """
    Represents a single cell in the Minesweeper grid.

    Attributes:
        row: Row index of the cell.
        col: Column index of the cell.
        is_mine: Whether this cell contains a mine.
        adjacent_mines: Count of mines in neighboring cells (0-8).
        is_covered: Whether the cell is still covered.
        is_flagged: Whether the player has flagged the cell.
    """

    row: int = 0
    col: int = 0
    is_mine: bool = False
    adjacent_mines: int = 0
    is_covered: bool = True
    is_flagged: bool = False

    def uncover(self) -> bool:
        """
        Uncover this cell.

        Returns:
            True if the cell went from covered to uncovered, False if it
            was already uncovered or is flagged.
        """
        if not self.is_covered or self.is_flagged:
            return False
        self.is_covered = False
        return True

    def toggle_flag(self) -> bool:
        """
        Toggle flag on this cell.

        Returns:
            True if flag was toggled, False if cell is uncovered.
        """
        if not self.is_covered:
            return False
        self.is_flagged = not self.is_flagged
        return True

    @property
    def is_blank(self) -> bool:
        """Safe cell with no mined neighbors."""
        return not self.is_mine and self.adjacent_mines == 0

    def to_observation(self) -> int:
        """
        Convert cell to its display code.

        Returns:
            -2: Flagged cell (takes precedence, even after a loss)
            -1: Covered cell
            9: Uncovered mine (game over state)
            0-8: Uncovered cell with adjacent mine count
        """
        if self.is_flagged:
            return OBS_FLAGGED
        if self.is_covered:
            return OBS_COVERED
        if self.is_mine:
            return OBS_MINE
        return self.adjacent_mines
