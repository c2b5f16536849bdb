"""
Rules engine for Reversi.

Pure functions over immutable Board values: move legality, capture and
flipping, move enumeration and piece counting. Nothing here raises for a bad
move; an illegal or out-of-range move is simply not legal, and applying it
returns the board unchanged.
"""
from typing import List, NamedTuple, Tuple

from .board import Board, Player, EMPTY

# Directions: N, S, W, E and the four diagonals, as (row delta, col delta)
DIRECTIONS = (
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1),           (0, 1),
    (1, -1),  (1, 0),  (1, 1),
)


class Score(NamedTuple):
    """Piece counts per player."""
    black: int
    white: int


def _scan(board: Board, row: int, col: int, dr: int, dc: int,
          player: Player) -> List[Tuple[int, int]]:
    """
    Walk from (row, col) in one direction and collect the contiguous run of
    opponent cells. The run is only returned if it is closed by one of
    ``player``'s pieces; otherwise nothing is captured in this direction.
    """
    opponent = player.opponent
    run = []
    r, c = row + dr, col + dc
    while board.in_bounds(r, c) and board[r, c] == opponent:
        run.append((r, c))
        r += dr
        c += dc

    if run and board.in_bounds(r, c) and board[r, c] == player:
        return run
    return []


def _is_open(board: Board, row: int, col: int) -> bool:
    return board.in_bounds(row, col) and board[row, col] == EMPTY


def is_legal_move(board: Board, row: int, col: int, player: Player) -> bool:
    """
    Check if ``player`` may place a piece at (row, col).

    A move is legal when the target cell is empty and at least one direction
    has one or more opponent pieces immediately followed by a piece of
    ``player``.
    """
    if not _is_open(board, row, col):
        return False
    return any(_scan(board, row, col, dr, dc, player) for dr, dc in DIRECTIONS)


def captured_cells(board: Board, row: int, col: int, player: Player) -> List[Tuple[int, int]]:
    """
    Get the opponent pieces that a move at (row, col) would flip.

    Args:
        board: Position to evaluate
        row: Row of the move (0-based)
        col: Column of the move (0-based)
        player: The player making the move

    Returns:
        List of (row, col) tuples, grouped by direction. Empty if the move
        is illegal.
    """
    if not _is_open(board, row, col):
        return []

    flips = []
    for dr, dc in DIRECTIONS:
        flips.extend(_scan(board, row, col, dr, dc, player))
    return flips


def apply_move(board: Board, row: int, col: int, player: Player) -> Board:
    """
    Play a move and return the resulting board.

    The input board is never modified. If the move is illegal the same
    board is returned, so this is safe to call speculatively.
    """
    flips = captured_cells(board, row, col, player)
    if not flips:
        return board
    return board.place(row, col, player, flips)


def get_valid_moves(board: Board, player: Player) -> List[Tuple[int, int]]:
    """
    Get all legal moves for ``player`` in row-major order.

    Returns:
        List of (row, col) tuples; empty if the player has no move
    """
    return [
        (row, col)
        for row in range(board.size)
        for col in range(board.size)
        if is_legal_move(board, row, col, player)
    ]


def has_valid_move(board: Board, player: Player) -> bool:
    """Check if the player has at least one legal move."""
    return any(
        is_legal_move(board, row, col, player)
        for row in range(board.size)
        for col in range(board.size)
    )


def count_pieces(board: Board) -> Score:
    """Count the pieces of each player. Empty cells are not counted."""
    cells = board.to_array()
    return Score(
        black=int((cells == Player.BLACK).sum()),
        white=int((cells == Player.WHITE).sum()),
    )
