"""
Board module for Reversi.
Holds the immutable board value the rules engine operates on.
"""
from enum import IntEnum
from typing import Iterable, Optional, Tuple
import numpy as np

# Cell tag for an unoccupied square
EMPTY = 0


class Player(IntEnum):
    """The two sides. BLACK (dark) always moves first."""
    BLACK = 1
    WHITE = 2

    @property
    def opponent(self) -> 'Player':
        return _OPPONENTS[self]


_OPPONENTS = {Player.BLACK: Player.WHITE, Player.WHITE: Player.BLACK}
_SYMBOLS = {EMPTY: '.', Player.BLACK: 'B', Player.WHITE: 'W'}
_TAGS = {symbol: tag for tag, symbol in _SYMBOLS.items()}


class Board:
    """
    Represents a square Reversi board as a read-only numpy array.

    A Board never changes after construction: every move produces a new
    Board (see ``place``), so boards can be shared freely between callers
    and threads.
    """

    MIN_SIZE = 4

    def __init__(self, cells):
        """
        Create a board from a 2D array of cell tags.

        Args:
            cells: Square array-like of EMPTY, Player.BLACK or Player.WHITE.
                   The data is always copied.
        """
        grid = np.array(cells, dtype=np.int8)
        if grid.ndim != 2 or grid.shape[0] != grid.shape[1]:
            raise ValueError(f"Board must be square, got shape {grid.shape}")
        if not np.isin(grid, (EMPTY, Player.BLACK, Player.WHITE)).all():
            raise ValueError("Board cells must be EMPTY, BLACK or WHITE")

        grid.setflags(write=False)
        self._cells = grid

    @classmethod
    def initial(cls, size: int = 8) -> 'Board':
        """
        Create the standard starting position.

        Args:
            size: Side length; must be even and at least 4

        Returns:
            Board with the four centre cells set, everything else empty
        """
        if size < cls.MIN_SIZE or size % 2 != 0:
            raise ValueError(f"Board size must be an even number >= {cls.MIN_SIZE}, got {size}")

        grid = np.zeros((size, size), dtype=np.int8)
        mid = size // 2
        grid[mid - 1, mid - 1] = Player.WHITE
        grid[mid - 1, mid] = Player.BLACK
        grid[mid, mid - 1] = Player.BLACK
        grid[mid, mid] = Player.WHITE
        return cls(grid)

    @classmethod
    def from_string(cls, text: str) -> 'Board':
        """
        Parse a board from rows of '.', 'B' and 'W' (whitespace between
        cells is optional), i.e. the format produced by ``str(board)``.
        """
        rows = []
        for line in text.strip().splitlines():
            symbols = line.replace(' ', '')
            if not symbols:
                continue
            try:
                rows.append([_TAGS[s] for s in symbols.upper()])
            except KeyError as e:
                raise ValueError(f"Unknown cell symbol {e.args[0]!r} in board text") from None
        return cls(rows)

    @property
    def size(self) -> int:
        return self._cells.shape[0]

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.size and 0 <= col < self.size

    def __getitem__(self, index):
        # Supports board[row, col] and board[row][col]; rows are read-only views
        return self._cells[index]

    def owner(self, row: int, col: int) -> Optional[Player]:
        """Get the player occupying a cell, or None if it is empty."""
        tag = int(self._cells[row, col])
        return None if tag == EMPTY else Player(tag)

    def place(self, row: int, col: int, player: Player,
              flips: Iterable[Tuple[int, int]] = ()) -> 'Board':
        """
        Return a new board with ``player`` placed at (row, col) and every
        cell in ``flips`` turned to ``player``. This board is left untouched.
        """
        grid = self._cells.copy()
        grid[row, col] = player
        for r, c in flips:
            grid[r, c] = player
        return Board(grid)

    def to_array(self) -> np.ndarray:
        """Get a writable copy of the cells as a numpy array."""
        return self._cells.copy()

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return np.array_equal(self._cells, other._cells)

    def __hash__(self) -> int:
        return hash((self.size, self._cells.tobytes()))

    def __repr__(self) -> str:
        return f"Board(size={self.size})"

    def __str__(self) -> str:
        """Return a string representation of the board."""
        return "\n".join(
            ' '.join(_SYMBOLS[int(tag)] for tag in row)
            for row in self._cells
        )
