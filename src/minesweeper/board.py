"""
Board module for Minesweeper game.

Implements the game board with mine placement, adjacency counts,
flood-fill uncovering and win detection.
"""
import logging
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import List, Optional, Sequence, Tuple

import numpy as np

from .cell import Cell, OBS_COVERED, OBS_FLAGGED, OBS_MINE
from .errors import CellUncovered, InvalidDimensions, OutOfBounds

logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

# Moore neighborhood, walked clockwise starting top-left
NEIGHBOR_OFFSETS: Tuple[Tuple[int, int], ...] = (
    (-1, -1), (-1, 0), (-1, 1), (0, 1),
    (1, 1), (1, 0), (1, -1), (0, -1),
)

# Above this mine density rejection sampling is replaced by a direct draw
DENSE_BOARD_RATIO = 0.5

FLAG_TOKEN = "P"
COVERED_TOKEN = "#"
MINE_TOKEN = "*"
BLANK_TOKEN = "."


class UncoverResult(Enum):
    """Outcome of uncovering a cell."""

    CONTINUE = auto()
    HIT_MINE = auto()
    FLAGGED = auto()


class FlagResult(Enum):
    """Outcome of toggling a flag."""

    FLAGGED = auto()
    UNFLAGGED = auto()


@dataclass
class BoardConfig:
    """
    Configuration for a Minesweeper board.

    Attributes:
        rows: Number of rows.
        cols: Number of columns.
        num_mines: Total mines to place.
    """

    rows: int = 9
    cols: int = 9
    num_mines: int = 10

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.rows < 1 or self.cols < 1:
            raise InvalidDimensions("Board dimensions must be positive")
        if self.num_mines < 0:
            raise InvalidDimensions("Number of mines cannot be negative")
        max_mines = self.rows * self.cols - 1
        if self.num_mines > max_mines:
            raise InvalidDimensions(f"Too many mines (max {max_mines})")

    @property
    def total_cells(self) -> int:
        return self.rows * self.cols


# ============================================================================
# Board Class
# ============================================================================

@dataclass
class Board:
    """
    Minesweeper game board.

    Mines are placed and adjacency counts computed as soon as the board
    is built; afterwards the board only changes through ``uncover`` and
    ``toggle_flag``.

    Attributes:
        config: Validated board dimensions and mine count.
        rng: Random generator used for mine placement.
        mine_positions: Explicit (row, col) mine layout, bypassing the
            random placement. Must hold exactly ``config.num_mines``
            distinct positions.
    """

    config: BoardConfig = field(default_factory=BoardConfig)
    rng: Optional[np.random.Generator] = field(default=None, repr=False)
    mine_positions: Optional[Sequence[Tuple[int, int]]] = field(
        default=None, repr=False
    )
    _grid: List[List[Cell]] = field(default_factory=list, repr=False)

    def __post_init__(self) -> None:
        """Build the grid, lay the mines and count neighbors."""
        if self.rng is None:
            self.rng = np.random.default_rng()
        self._init_grid()
        if self.mine_positions is None:
            self._place_random_mines()
        else:
            self._place_given_mines(self.mine_positions)
        self._calculate_adjacent_mines()
        logger.debug(
            f"[minesweeper] board generated rows={self.rows} cols={self.cols} "
            f"mines={self.config.num_mines}"
        )

    @classmethod
    def create(
        cls,
        rows: int,
        cols: int,
        num_mines: int,
        rng: Optional[np.random.Generator] = None,
        mine_positions: Optional[Sequence[Tuple[int, int]]] = None,
    ) -> "Board":
        """
        Validate dimensions and build a ready-to-play board.

        Raises:
            InvalidDimensions: If rows/cols/mines are out of range or the
                explicit mine layout does not match ``num_mines``.
        """
        config = BoardConfig(rows=rows, cols=cols, num_mines=num_mines)
        return cls(config=config, rng=rng, mine_positions=mine_positions)

    # ========================================================================
    # Grid Initialization (Low-level)
    # ========================================================================

    def _init_grid(self) -> None:
        """Create grid of covered, unmined cells."""
        self._grid = [
            [Cell(row=row, col=col) for col in range(self.config.cols)]
            for row in range(self.config.rows)
        ]

    def _place_random_mines(self) -> None:
        """
        Mark ``num_mines`` distinct cells as mined, uniformly at random.

        Sparse boards draw a random cell until an unmined one turns up,
        once per mine. Dense boards draw the mine indices without
        replacement in a single pass.
        """
        num_mines = self.config.num_mines
        if num_mines > self.config.total_cells * DENSE_BOARD_RATIO:
            indices = self.rng.choice(
                self.config.total_cells, size=num_mines, replace=False
            )
            for index in indices:
                row, col = divmod(int(index), self.config.cols)
                self._grid[row][col].is_mine = True
            return

        for _ in range(num_mines):
            row, col = self._random_position()
            while self._grid[row][col].is_mine:
                row, col = self._random_position()
            self._grid[row][col].is_mine = True

    def _random_position(self) -> Tuple[int, int]:
        row = int(self.rng.integers(self.config.rows))
        col = int(self.rng.integers(self.config.cols))
        return row, col

    def _place_given_mines(self, positions: Sequence[Tuple[int, int]]) -> None:
        """Mark an explicit set of positions as mined."""
        unique = set(positions)
        if len(unique) != len(positions):
            raise InvalidDimensions("Mine positions must be distinct")
        if len(unique) != self.config.num_mines:
            raise InvalidDimensions(
                f"Expected {self.config.num_mines} mine positions, "
                f"got {len(unique)}"
            )
        for row, col in unique:
            if not self._is_valid_position(row, col):
                raise InvalidDimensions(
                    f"Mine position ({row}, {col}) is outside the board"
                )
            self._grid[row][col].is_mine = True

    def _calculate_adjacent_mines(self) -> None:
        """Add one to every neighbor of every mine."""
        for row in range(self.config.rows):
            for col in range(self.config.cols):
                if not self._grid[row][col].is_mine:
                    continue
                for neighbor_row, neighbor_col in self._get_neighbors(row, col):
                    self._grid[neighbor_row][neighbor_col].adjacent_mines += 1

    # ========================================================================
    # Neighbor Utilities (Low-level)
    # ========================================================================

    def _get_neighbors(
        self, row: int, col: int
    ) -> List[Tuple[int, int]]:
        """
        Get valid neighboring cell positions.

        Args:
            row: Row index of center cell.
            col: Column index of center cell.

        Returns:
            List of (row, col) tuples in ``NEIGHBOR_OFFSETS`` order.
        """
        neighbors = []
        for delta_row, delta_col in NEIGHBOR_OFFSETS:
            new_row = row + delta_row
            new_col = col + delta_col
            if self._is_valid_position(new_row, new_col):
                neighbors.append((new_row, new_col))
        return neighbors

    def _is_valid_position(self, row: int, col: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= row < self.config.rows and 0 <= col < self.config.cols

    def _require_position(self, row: int, col: int) -> Cell:
        if not self._is_valid_position(row, col):
            raise OutOfBounds(row, col, self.config.rows, self.config.cols)
        return self._grid[row][col]

    # ========================================================================
    # Game Actions (Mid-level)
    # ========================================================================

    def uncover(self, row: int, col: int) -> UncoverResult:
        """
        Uncover the cell at the given position.

        A mined cell uncovers the whole board. A blank cell (no adjacent
        mines) uncovers its neighbors transitively.

        Args:
            row: Row index to uncover.
            col: Column index to uncover.

        Returns:
            FLAGGED if the cell carries a flag (nothing changes),
            HIT_MINE if it was a mine, CONTINUE otherwise.

        Raises:
            OutOfBounds: If the position is not on the board.
        """
        cell = self._require_position(row, col)
        if cell.is_flagged:
            return UncoverResult.FLAGGED
        if cell.is_mine:
            self.reveal_all()
            return UncoverResult.HIT_MINE

        uncovered = self._flood_uncover(row, col)
        logger.debug(
            f"[minesweeper] uncover row={row} col={col} uncovered={uncovered}"
        )
        return UncoverResult.CONTINUE

    def _flood_uncover(self, row: int, col: int) -> int:
        """
        Uncover from (row, col) using an explicit work stack.

        Returns:
            Number of cells that went from covered to uncovered.
        """
        uncovered = 0
        pending = [(row, col)]
        while pending:
            current_row, current_col = pending.pop()
            cell = self._grid[current_row][current_col]
            if cell.uncover():
                uncovered += 1
            if cell.adjacent_mines > 0:
                continue
            for neighbor_row, neighbor_col in self._get_neighbors(
                current_row, current_col
            ):
                neighbor = self._grid[neighbor_row][neighbor_col]
                if neighbor.is_covered and not neighbor.is_flagged:
                    # Mark now so the same cell is never queued twice
                    if neighbor.uncover():
                        uncovered += 1
                    if neighbor.adjacent_mines == 0:
                        pending.append((neighbor_row, neighbor_col))
        return uncovered

    def reveal_all(self) -> None:
        """Remove the cover from every cell. Flags stay in place."""
        for row in self._grid:
            for cell in row:
                cell.is_covered = False

    def toggle_flag(self, row: int, col: int) -> FlagResult:
        """
        Toggle flag on a cell.

        Args:
            row: Row index.
            col: Column index.

        Returns:
            FLAGGED if the cell now carries a flag, UNFLAGGED otherwise.

        Raises:
            OutOfBounds: If the position is not on the board.
            CellUncovered: If the cell is already uncovered.
        """
        cell = self._require_position(row, col)
        if not cell.toggle_flag():
            raise CellUncovered(row, col)
        return FlagResult.FLAGGED if cell.is_flagged else FlagResult.UNFLAGGED

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    @property
    def rows(self) -> int:
        return self.config.rows

    @property
    def cols(self) -> int:
        return self.config.cols

    @property
    def mine_count(self) -> int:
        return self.config.num_mines

    @property
    def flag_count(self) -> int:
        """Number of flagged cells currently on the board."""
        return sum(cell.is_flagged for cell in self.cells())

    @property
    def covered_count(self) -> int:
        """Number of cells still covered."""
        return sum(cell.is_covered for cell in self.cells())

    def cells(self) -> List[Cell]:
        """All cells in row-major order."""
        return [cell for row in self._grid for cell in row]

    def get_cell(self, row: int, col: int) -> Optional[Cell]:
        """Get cell at position, or None if invalid."""
        if not self._is_valid_position(row, col):
            return None
        return self._grid[row][col]

    def is_won(self) -> bool:
        """Every mine is flagged and every safe cell is uncovered."""
        for cell in self.cells():
            if cell.is_mine and not cell.is_flagged:
                return False
            if not cell.is_mine and cell.is_covered:
                return False
        return True

    def get_observation(self) -> np.ndarray:
        """
        Get board state as a numpy array.

        Returns:
            2D int8 array where:
                -2 = flagged
                -1 = covered
                0-8 = uncovered with adjacent count
                9 = uncovered mine
        """
        obs = np.zeros((self.config.rows, self.config.cols), dtype=np.int8)
        for row in range(self.config.rows):
            for col in range(self.config.cols):
                obs[row, col] = self._grid[row][col].to_observation()
        return obs

    def render(self) -> List[List[str]]:
        """
        Get one display token per cell, row by row.

        Tokens: ``P`` flagged, ``#`` covered, ``*`` uncovered mine,
        ``.`` uncovered with no adjacent mines, else the count.
        """
        return [
            [_token(int(value)) for value in obs_row]
            for obs_row in self.get_observation()
        ]


def _token(value: int) -> str:
    """Map an observation code to its display token."""
    if value == OBS_FLAGGED:
        return FLAG_TOKEN
    if value == OBS_COVERED:
        return COVERED_TOKEN
    if value == OBS_MINE:
        return MINE_TOKEN
    if value == 0:
        return BLANK_TOKEN
    return str(value)
