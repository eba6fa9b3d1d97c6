"""
Minesweeper game module.

Provides the board engine, the command session and the text shell.
"""
from .cell import Cell
from .board import Board, BoardConfig, FlagResult, UncoverResult
from .errors import (
    AlreadyTerminal,
    CellFlagged,
    CellUncovered,
    InvalidArguments,
    InvalidDimensions,
    MinesweeperError,
    NoActiveBoard,
    OutOfBounds,
    UnknownCommand,
)
from .session import CommandResult, GameSession, GameState, Outcome

__all__ = [
    "Cell",
    "Board",
    "BoardConfig",
    "FlagResult",
    "UncoverResult",
    "CommandResult",
    "GameSession",
    "GameState",
    "Outcome",
    "MinesweeperError",
    "InvalidDimensions",
    "OutOfBounds",
    "CellFlagged",
    "CellUncovered",
    "NoActiveBoard",
    "AlreadyTerminal",
    "UnknownCommand",
    "InvalidArguments",
]
