"""
Text shell for Minesweeper.

Reads command lines, hands parsed integers to a GameSession and prints
the results. All game rules live in the session and board.
"""
from typing import Callable, List, Tuple

from .errors import InvalidArguments, UnknownCommand
from .session import CommandResult, GameSession, Outcome


PROMPT = ">> "

WELCOME = """
### Welcome to Minesweeper! ###

Command list:
[new] r c m: Creates a new board with r rows, c columns, and m mines.
[show]: Shows the current board.
[uncover] r c: Uncovers the cell at r, c.
[flag] r c: Flags or unflags the cell at r, c.
[quit]: Ends the game.
"""

WIN_MESSAGE = "Congrats! You win!"
LOSE_MESSAGE = "You hit a mine! Game Over!"


# ============================================================================
# Parsing
# ============================================================================

def parse_command(line: str) -> Tuple[str, List[int]]:
    """
    Split a command line into a lowercase name and integer arguments.

    Raises:
        UnknownCommand: If the line is blank.
        InvalidArguments: If an argument is not an integer.
    """
    tokens = line.split()
    if not tokens:
        raise UnknownCommand("")
    name = tokens[0].lower()
    args = []
    for token in tokens[1:]:
        try:
            args.append(int(token))
        except ValueError:
            raise InvalidArguments(f"Not a number: {token!r}") from None
    return name, args


# ============================================================================
# Formatting
# ============================================================================

def format_grid(grid: List[List[str]]) -> str:
    """Lay out tokens with a column header and row indices."""
    if not grid:
        return ""
    lines = ["   " + " ".join(str(col) for col in range(len(grid[0]))), ""]
    for row, tokens in enumerate(grid):
        lines.append(f"{row} " + "".join(f"{token:>2}" for token in tokens))
    return "\n".join(lines)


def format_board(session: GameSession, grid: List[List[str]]) -> str:
    """Board layout followed by the mine and flag totals."""
    return "\n".join([
        "",
        format_grid(grid),
        f"Total Mines: {session.mine_count}",
        f"Total flags used: {session.flags_placed}",
        "",
    ])


# ============================================================================
# Read-Eval-Print Loop
# ============================================================================

def handle_line(
    session: GameSession,
    line: str,
    output_fn: Callable[[str], None] = print,
) -> CommandResult:
    """
    Run one command line against the session and print what happened.

    Args:
        session: Session receiving the command.
        line: Raw text typed by the player.
        output_fn: Where to write text.

    Returns:
        The command result (REJECTED for unparseable lines).
    """
    try:
        name, args = parse_command(line)
    except (UnknownCommand, InvalidArguments) as exc:
        output_fn(f"Invalid Command, please try again. ({exc})")
        return CommandResult(Outcome.REJECTED, error=exc)

    if name == "new" and len(args) == 3:
        output_fn(
            f"Generating new board with dimensions : {args[0]} x {args[1]} "
            f"and {args[2]} mines..."
        )

    result = session.execute(name, *args)

    if result.outcome == Outcome.REJECTED:
        if isinstance(result.error, (UnknownCommand, InvalidArguments)):
            output_fn(f"Invalid Command, please try again. ({result.error})")
        else:
            output_fn(str(result.error))
    elif result.outcome != Outcome.QUIT:
        output_fn(format_board(session, result.grid))
        if result.outcome == Outcome.WON:
            output_fn(WIN_MESSAGE)
        elif result.outcome == Outcome.LOST:
            output_fn(LOSE_MESSAGE)
    return result


def run(
    session: GameSession,
    input_fn: Callable[[str], str] = input,
    output_fn: Callable[[str], None] = print,
) -> None:
    """
    Prompt for commands until the player quits or input runs out.

    Args:
        session: Session to drive.
        input_fn: Reads one line given a prompt.
        output_fn: Writes one block of text.
    """
    output_fn(WELCOME)
    while not session.finished:
        try:
            line = input_fn(PROMPT)
        except EOFError:
            break
        handle_line(session, line, output_fn)
