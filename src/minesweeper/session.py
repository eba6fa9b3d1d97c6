"""
Game session module for Minesweeper.

Owns the mutable state of one play session (current board, flag counter,
game status) and maps player commands to board operations.
"""
import logging
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Callable, Dict, List, Optional, Sequence, Tuple

import numpy as np

from .board import Board, FlagResult, UncoverResult
from .errors import (
    AlreadyTerminal,
    CellFlagged,
    InvalidArguments,
    MinesweeperError,
    NoActiveBoard,
    UnknownCommand,
)

logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

# Number of integer arguments each command takes
_ARITY = {"new": 3, "show": 0, "uncover": 2, "flag": 2, "quit": 0}


class GameState(Enum):
    """Possible states of the session."""

    NO_BOARD = auto()
    IN_PROGRESS = auto()
    WON = auto()
    LOST = auto()


class Outcome(Enum):
    """What a command did."""

    CONTINUE = auto()
    WON = auto()
    LOST = auto()
    REJECTED = auto()
    QUIT = auto()


@dataclass
class CommandResult:
    """
    Result of a single session command.

    Attributes:
        outcome: What happened.
        error: Reason for a REJECTED outcome, None otherwise.
        grid: Board tokens after the command, when a board exists.
    """

    outcome: Outcome
    error: Optional[MinesweeperError] = None
    grid: List[List[str]] = field(default_factory=list)

    @property
    def rejected(self) -> bool:
        return self.outcome == Outcome.REJECTED


# ============================================================================
# Game Session
# ============================================================================

class GameSession:
    """
    Command state machine over NO_BOARD, IN_PROGRESS, WON and LOST.

    Every command returns a CommandResult. A rejected command leaves the
    session exactly as it was.
    """

    def __init__(
        self,
        seed: Optional[int] = None,
        rng: Optional[np.random.Generator] = None,
    ) -> None:
        """
        Initialize an empty session.

        Args:
            seed: Seed for the mine placement generator.
            rng: Explicit generator, takes precedence over ``seed``.
        """
        self.rng = rng if rng is not None else np.random.default_rng(seed)
        self.board: Optional[Board] = None
        self.flags_placed = 0
        self.state = GameState.NO_BOARD
        self.finished = False

        self._commands: Dict[str, Callable[..., CommandResult]] = {
            "new": self.new,
            "show": self.show,
            "uncover": self.uncover,
            "flag": self.flag,
            "quit": self.quit,
        }

    # ========================================================================
    # Commands
    # ========================================================================

    def new(
        self,
        rows: int,
        cols: int,
        mines: int,
        mine_positions: Optional[Sequence[Tuple[int, int]]] = None,
    ) -> CommandResult:
        """
        Discard any current board and start a fresh game.

        Args:
            rows: Number of rows.
            cols: Number of columns.
            mines: Number of mines.
            mine_positions: Fixed mine layout instead of a random one.
        """
        try:
            board = Board.create(
                rows, cols, mines, rng=self.rng, mine_positions=mine_positions
            )
        except MinesweeperError as exc:
            return self._reject(exc)
        self.board = board
        self.flags_placed = 0
        self._transition(GameState.IN_PROGRESS)
        return self._result(Outcome.CONTINUE)

    def show(self) -> CommandResult:
        """Return the current grid without changing anything."""
        if self.board is None:
            return self._reject(NoActiveBoard())
        return self._result(Outcome.CONTINUE)

    def uncover(self, row: int, col: int) -> CommandResult:
        """Uncover a cell; may win or lose the game."""
        error = self._check_playable()
        if error is not None:
            return self._reject(error)
        try:
            result = self.board.uncover(row, col)
        except MinesweeperError as exc:
            return self._reject(exc)

        if result == UncoverResult.FLAGGED:
            return self._reject(CellFlagged(row, col))
        if result == UncoverResult.HIT_MINE:
            self._transition(GameState.LOST)
            return self._result(Outcome.LOST)
        return self._check_win()

    def flag(self, row: int, col: int) -> CommandResult:
        """Toggle a flag; flagging the last mine may win the game."""
        error = self._check_playable()
        if error is not None:
            return self._reject(error)
        try:
            result = self.board.toggle_flag(row, col)
        except MinesweeperError as exc:
            return self._reject(exc)

        self.flags_placed += 1 if result == FlagResult.FLAGGED else -1
        logger.debug(
            f"[minesweeper] flag row={row} col={col} result={result.name} "
            f"flags_placed={self.flags_placed}"
        )
        return self._check_win()

    def quit(self) -> CommandResult:
        """End the session. Accepted in any state."""
        self.finished = True
        return CommandResult(Outcome.QUIT)

    def execute(self, name: str, *args: int) -> CommandResult:
        """
        Run a command by name with already-parsed integer arguments.

        Args:
            name: One of new, show, uncover, flag, quit.
            *args: Integer arguments for the command.

        Returns:
            The command's result; unknown names and wrong argument counts
            come back rejected.
        """
        command = self._commands.get(name)
        if command is None:
            return self._reject(UnknownCommand(name))
        expected = _ARITY[name]
        if len(args) != expected:
            return self._reject(
                InvalidArguments(
                    f"{name} takes {expected} argument(s), got {len(args)}"
                )
            )
        return command(*args)

    # ========================================================================
    # State Accessors
    # ========================================================================

    @property
    def is_terminal(self) -> bool:
        """Current board was won or lost."""
        return self.state in (GameState.WON, GameState.LOST)

    @property
    def mine_count(self) -> int:
        return self.board.mine_count if self.board is not None else 0

    # ========================================================================
    # Helpers
    # ========================================================================

    def _check_playable(self) -> Optional[MinesweeperError]:
        if self.board is None:
            return NoActiveBoard()
        if self.is_terminal:
            return AlreadyTerminal(self.state.name)
        return None

    def _check_win(self) -> CommandResult:
        if self.board.is_won():
            self._transition(GameState.WON)
            return self._result(Outcome.WON)
        return self._result(Outcome.CONTINUE)

    def _transition(self, state: GameState) -> None:
        logger.debug(f"[minesweeper] state {self.state.name} -> {state.name}")
        self.state = state

    def _result(self, outcome: Outcome) -> CommandResult:
        grid = self.board.render() if self.board is not None else []
        return CommandResult(outcome, grid=grid)

    def _reject(self, error: MinesweeperError) -> CommandResult:
        logger.info(f"[minesweeper] rejected: {error}")
        grid = self.board.render() if self.board is not None else []
        return CommandResult(Outcome.REJECTED, error=error, grid=grid)
