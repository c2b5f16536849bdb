"""
Reversi (Othello) rules engine and game session.
"""
from .game import Board, Player, ReversiGame, Outcome

__version__ = "0.2"

__all__ = ['Board', 'Player', 'ReversiGame', 'Outcome']
