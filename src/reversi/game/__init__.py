"""
Reversi game module.
This package contains the board, the rules engine and the game session.
"""

from .board import Board, Player, EMPTY
from .rules import (
    DIRECTIONS,
    Score,
    apply_move,
    captured_cells,
    count_pieces,
    get_valid_moves,
    has_valid_move,
    is_legal_move,
)
from .game import ReversiGame, Outcome, next_player, determine_winner

__all__ = [
    'Board', 'Player', 'EMPTY',
    'DIRECTIONS', 'Score', 'apply_move', 'captured_cells', 'count_pieces',
    'get_valid_moves', 'has_valid_move', 'is_legal_move',
    'ReversiGame', 'Outcome', 'next_player', 'determine_winner',
]
