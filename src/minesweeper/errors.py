"""
Error types for the Minesweeper game.

Every rejected command raises one of these. They all derive from
``ValueError`` so callers can treat them as bad input.
"""


class MinesweeperError(ValueError):
    """Base class for all recoverable game errors."""


# ============================================================================
# Board Errors
# ============================================================================

class InvalidDimensions(MinesweeperError):
    """Rows, columns or mine count out of range for a new board."""


class OutOfBounds(MinesweeperError):
    """Row or column outside the current board."""

    def __init__(self, row: int, col: int, rows: int, cols: int) -> None:
        super().__init__(
            f"Cell ({row}, {col}) is outside the {rows}x{cols} board"
        )
        self.row = row
        self.col = col


class CellFlagged(MinesweeperError):
    """Uncover targeted a flagged cell."""

    def __init__(self, row: int, col: int) -> None:
        super().__init__(f"Cell at {row}, {col} is flagged")
        self.row = row
        self.col = col


class CellUncovered(MinesweeperError):
    """Flag targeted a cell that is already uncovered."""

    def __init__(self, row: int, col: int) -> None:
        super().__init__(f"Cell at {row}, {col} is already uncovered")
        self.row = row
        self.col = col


# ============================================================================
# Session Errors
# ============================================================================

class NoActiveBoard(MinesweeperError):
    """A board command was issued before any ``new``."""

    def __init__(self) -> None:
        super().__init__("No board yet, start one with: new r c m")


class AlreadyTerminal(MinesweeperError):
    """A move was issued after the game was won or lost."""

    def __init__(self, state_name: str) -> None:
        super().__init__(
            f"Game is already {state_name.lower()}, start a new one with: new r c m"
        )
        self.state_name = state_name


# ============================================================================
# Shell Errors
# ============================================================================

class UnknownCommand(MinesweeperError):
    """Command name not recognised."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown command: {name!r}" if name else "Empty command")
        self.name = name


class InvalidArguments(MinesweeperError):
    """Wrong number or type of command arguments."""
