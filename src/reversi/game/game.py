"""
Reversi game module.
Handles game flow and session state on top of the rules engine.
"""
import logging
from enum import Enum
from typing import List, Optional, Tuple
import numpy as np

from .board import Board, Player
from .rules import apply_move, count_pieces, get_valid_moves, has_valid_move, is_legal_move, Score

logger = logging.getLogger(__name__)


class Outcome(Enum):
    """Result of a finished game."""
    BLACK = 'black'
    WHITE = 'white'
    TIE = 'tie'


def next_player(board: Board, mover: Player) -> Optional[Player]:
    """
    Decide who moves after ``mover`` has played on ``board``.

    The opponent moves if they have a legal move. Otherwise ``mover`` plays
    again if they still can. If neither side can move the game is over.

    Returns:
        The player to move, or None when the game has ended
    """
    if has_valid_move(board, mover.opponent):
        return mover.opponent
    if has_valid_move(board, mover):
        return mover
    return None


def determine_winner(board: Board) -> Outcome:
    """Determine the winner of a finished game by piece count."""
    black, white = count_pieces(board)
    if black > white:
        return Outcome.BLACK
    if white > black:
        return Outcome.WHITE
    return Outcome.TIE


class ReversiGame:
    """
    Main game class for Reversi that manages the game state and flow.
    """

    def __init__(self, size: int = 8):
        """
        Initialize a new Reversi game.

        Args:
            size: Size of the board (default: 8 for standard Reversi)
        """
        self.size = size
        self.reset()

    def reset(self) -> None:
        """Reset the game to its initial state."""
        self.board = Board.initial(self.size)
        self.current_player = Player.BLACK  # Black moves first
        self.game_over = False
        self.winner: Optional[Outcome] = None
        logger.info("New %dx%d game started", self.size, self.size)

    def set_position(self, board: Board, current_player: Player) -> None:
        """
        Load an arbitrary position into the session.

        Args:
            board: Board to play from; must match the session's size
            current_player: The player to move
        """
        if board.size != self.size:
            raise ValueError(f"Board size {board.size} does not match game size {self.size}")

        self.board = board
        self.current_player = current_player
        self.game_over = False
        self.winner = None

        if not has_valid_move(board, current_player):
            # The side to move is stuck: hand the turn over as if they had just passed
            self._advance(current_player.opponent)

    def make_move(self, row: int, col: int) -> bool:
        """
        Make a move for the current player.

        Args:
            row: Row of the move (0-based)
            col: Column of the move (0-based)

        Returns:
            bool: True if the move was valid and made, False otherwise
        """
        if self.game_over:
            logger.debug("Ignoring move (%d, %d): game is over", row, col)
            return False

        mover = self.current_player
        if not is_legal_move(self.board, row, col, mover):
            logger.debug("Ignoring illegal move (%d, %d) for %s", row, col, mover.name)
            return False

        self.board = apply_move(self.board, row, col, mover)
        logger.debug("%s played (%d, %d)", mover.name, row, col)
        self._advance(mover)
        return True

    def _advance(self, mover: Player) -> None:
        player = next_player(self.board, mover)
        if player is not None:
            if player is mover:
                logger.info("%s has no legal move, %s plays again", mover.opponent.name, mover.name)
            self.current_player = player
            return

        self.game_over = True
        self.winner = determine_winner(self.board)
        black, white = self.get_score()
        logger.info("Game over: %s (black %d, white %d)", self.winner.value, black, white)

    def get_valid_moves(self) -> List[Tuple[int, int]]:
        """
        Get all valid moves for the current player.

        Returns:
            List of (row, col) tuples representing valid moves
        """
        if self.game_over:
            return []
        return get_valid_moves(self.board, self.current_player)

    def is_game_over(self) -> bool:
        """Check if the game is over."""
        return self.game_over

    def get_winner(self) -> Optional[Outcome]:
        """
        Get the winner of the game.

        Returns:
            Outcome.BLACK, Outcome.WHITE or Outcome.TIE, None if game not over
        """
        return self.winner

    def get_score(self) -> Score:
        """
        Get the current score (black, white).

        Returns:
            Score named tuple of (black, white)
        """
        return count_pieces(self.board)

    def get_board_state(self) -> np.ndarray:
        """
        Get the current board state as a numpy array.

        Returns:
            2D numpy array representing the board state
        """
        return self.board.to_array()

    def get_current_player(self) -> Player:
        return self.current_player

    def __str__(self) -> str:
        """String representation of the game state."""
        black, white = self.get_score()
        lines = [
            str(self.board),
            f"Current player: {self.current_player.name.capitalize()}",
            f"Score - Black: {black}, White: {white}",
        ]
        if self.game_over:
            if self.winner is Outcome.TIE:
                lines.append("Game over! It's a draw!")
            else:
                lines.append(f"Game over! {self.winner.value.capitalize()} wins!")
        return "\n".join(lines)
