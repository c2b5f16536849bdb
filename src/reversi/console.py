"""
Text front-end for playing Reversi in a terminal.
"""
import logging
import string
from typing import Callable, Iterable, NamedTuple, Optional, Sequence, Tuple

from .game import ReversiGame, Outcome, Player

logger = logging.getLogger(__name__)

HELP_TEXT = """Commands:
  <row> <col>   play a move, 0-based (e.g. "2 3")
  <col><row>    play a move in algebraic form (e.g. "d3")
  moves         list the legal moves
  reset         start the game over
  new <size>    start a new game on another board size (e.g. "new 6")
  help          show this message
  quit          leave the game"""

_SYMBOLS = {None: '.', Player.BLACK: 'B', Player.WHITE: 'W'}


class Command(NamedTuple):
    """
    A parsed console command. ``move`` is set only for 'move' commands and
    ``size`` only for 'new' commands.
    """
    name: str
    move: Optional[Tuple[int, int]] = None
    size: Optional[int] = None


def parse_command(line: str) -> Optional[Command]:
    """
    Parse one line of user input.

    Returns:
        Command, or None if the line is not understood
    """
    text = line.strip().lower()
    if not text:
        return None
    if text in ('quit', 'exit', 'q'):
        return Command('quit')
    if text in ('reset', 'moves', 'help'):
        return Command(text)

    parts = text.replace(',', ' ').split()
    if len(parts) == 2 and parts[0] == 'new' and parts[1].isdecimal():
        return Command('new', size=int(parts[1]))
    if len(parts) == 2 and all(p.isdecimal() for p in parts):
        return Command('move', (int(parts[0]), int(parts[1])))

    # Algebraic: column letter followed by a 1-based row number
    if len(parts) == 1 and len(text) >= 2 and text[0] in string.ascii_lowercase and text[1:].isdecimal():
        row = int(text[1:]) - 1
        if row >= 0:
            return Command('move', (row, string.ascii_lowercase.index(text[0])))
    return None


def format_move(move: Tuple[int, int]) -> str:
    """Format a move in algebraic form, e.g. (2, 3) -> 'd3'."""
    row, col = move
    return f"{string.ascii_lowercase[col]}{row + 1}"


def render(game: ReversiGame) -> str:
    """
    Render the board with column letters and row numbers. Legal moves for
    the player to move are marked with '*'.
    """
    valid = set(game.get_valid_moves())
    size = game.size
    lines = ['   ' + ' '.join(string.ascii_lowercase[:size])]
    for row in range(size):
        cells = []
        for col in range(size):
            if (row, col) in valid:
                cells.append('*')
            else:
                cells.append(_SYMBOLS[game.board.owner(row, col)])
        lines.append(f"{row + 1:>2} " + ' '.join(cells))

    black, white = game.get_score()
    lines.append(f"Black: {black}  White: {white}")
    if game.is_game_over():
        winner = game.get_winner()
        if winner is Outcome.TIE:
            lines.append("Game over! It's a draw!")
        else:
            lines.append(f"Game over! {winner.value.capitalize()} wins!")
    else:
        lines.append(f"{game.get_current_player().name.capitalize()} to move")
    return "\n".join(lines)


def run_session(game: ReversiGame, lines: Iterable[str],
                write: Callable[[str], None] = print,
                allowed_sizes: Sequence[int] = (6, 8)) -> ReversiGame:
    """
    Drive a game from a stream of input lines until 'quit' or end of input.

    Illegal moves leave the game unchanged and the board is simply shown
    again.

    Args:
        game: The game session to play
        lines: Input lines, e.g. ``sys.stdin``
        write: Output function
        allowed_sizes: Board sizes accepted by the 'new' command

    Returns:
        The game in its final state (a different object if 'new' was used)
    """
    write(render(game))
    for line in lines:
        command = parse_command(line)
        if command is None:
            write("Unrecognised input, type 'help' for commands")
            continue

        if command.name == 'quit':
            break
        if command.name == 'help':
            write(HELP_TEXT)
        elif command.name == 'moves':
            moves = game.get_valid_moves()
            write(' '.join(format_move(m) for m in moves) if moves else "No legal moves")
        elif command.name == 'reset':
            game.reset()
            write(render(game))
        elif command.name == 'new':
            if command.size in allowed_sizes:
                game = ReversiGame(command.size)
                write(render(game))
            else:
                write(f"Board size must be one of {', '.join(str(s) for s in allowed_sizes)}")
        elif command.name == 'move':
            row, col = command.move
            game.make_move(row, col)
            write(render(game))
    logger.debug("Session ended")
    return game
