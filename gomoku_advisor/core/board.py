"""
Board state for the Gomoku advisor.
"""
import numpy as np

from .coords import BOARD_SIZE, format_move
from .errors import IllegalMove

EMPTY = 0
BLACK = 1
WHITE = -1

PLAYING = 'playing'
BLACK_WIN = 'black_win'
WHITE_WIN = 'white_win'
DRAW = 'draw'

STATUSES = (PLAYING, BLACK_WIN, WHITE_WIN, DRAW)


def opponent(player):
    """Return the other side (1 <-> -1)."""
    return -player


def stone_char(value):
    """Map a cell value to its display character."""
    if value == BLACK:
        return 'X'
    if value == WHITE:
        return 'O'
    return '.'


class BoardState:
    """
    Immutable snapshot of a 15x15 Gomoku game.

    Board representation:
    - 0: empty cell
    - 1: black stone (moves first, shown as X)
    - -1: white stone (shown as O)

    Every update returns a new BoardState; the grid held by an instance is
    read-only so analysis code can share it freely.
    """

    __slots__ = ('_grid', '_current_player', '_status', '_move_history')

    def __init__(self, grid, current_player=BLACK, status=PLAYING, move_history=()):
        """
        Build a state from an existing grid.

        Args:
            grid (array-like): 15x15 cell values (copied)
            current_player (int): Side to move next (1 or -1)
            status (str): One of 'playing', 'black_win', 'white_win', 'draw'
            move_history (iterable): Textual moves played so far
        """
        grid = np.array(grid, dtype=np.int8)
        if grid.shape != (BOARD_SIZE, BOARD_SIZE):
            raise ValueError(f"grid must be {BOARD_SIZE}x{BOARD_SIZE}, got {grid.shape}")
        if current_player not in (BLACK, WHITE):
            raise ValueError("current_player must be 1 (black) or -1 (white)")
        if status not in STATUSES:
            raise ValueError(f"unknown status {status!r}")
        grid.setflags(write=False)
        self._grid = grid
        self._current_player = current_player
        self._status = status
        self._move_history = tuple(move_history)

    @classmethod
    def create(cls):
        """Return an empty board with black to move."""
        return cls(np.zeros((BOARD_SIZE, BOARD_SIZE), dtype=np.int8))

    @property
    def size(self):
        return BOARD_SIZE

    @property
    def grid(self):
        """Read-only numpy view of the cells."""
        return self._grid

    @property
    def current_player(self):
        return self._current_player

    @property
    def status(self):
        return self._status

    @property
    def move_history(self):
        return self._move_history

    @property
    def move_count(self):
        return len(self._move_history)

    @property
    def last_move(self):
        """Textual coordinate of the most recent move, or None."""
        return self._move_history[-1] if self._move_history else None

    def in_bounds(self, row, col):
        return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE

    def is_empty(self, row, col):
        return self.in_bounds(row, col) and self._grid[row, col] == EMPTY

    def apply(self, row, col, player):
        """
        Place a stone and return the successor state.

        Args:
            row (int): Row position (0-14)
            col (int): Column position (0-14)
            player (int): Player (1 for black, -1 for white)

        Returns:
            BoardState: New state with the stone placed, the other side to
            move, the move appended to the history

        Raises:
            IllegalMove: If the cell is out of bounds or already occupied
        """
        if player not in (BLACK, WHITE):
            raise ValueError("player must be 1 (black) or -1 (white)")
        if not self.in_bounds(row, col):
            raise IllegalMove(row, col, f"({row}, {col}) is outside the board")
        if self._grid[row, col] != EMPTY:
            raise IllegalMove(row, col, f"{format_move(row, col)} is already occupied")

        grid = self._grid.copy()
        grid[row, col] = player
        return BoardState(grid,
                          current_player=opponent(player),
                          status=self._status,
                          move_history=self._move_history + (format_move(row, col),))

    def with_status(self, status):
        """Return a copy of this state carrying a different status tag."""
        return BoardState(self._grid, self._current_player, status, self._move_history)

    def get_legal_moves(self):
        """
        Get all empty positions in row-major order.

        Returns:
            list: (row, col) tuples
        """
        rows, cols = np.nonzero(self._grid == EMPTY)
        return list(zip(rows.tolist(), cols.tolist()))

    def stones(self, player):
        """Return (row, col) of every stone owned by ``player`` in row-major order."""
        rows, cols = np.nonzero(self._grid == player)
        return list(zip(rows.tolist(), cols.tolist()))

    def stone_count(self):
        return int(np.count_nonzero(self._grid))

    def is_full(self):
        return self.stone_count() == BOARD_SIZE * BOARD_SIZE

    def __eq__(self, other):
        if not isinstance(other, BoardState):
            return NotImplemented
        return (np.array_equal(self._grid, other._grid)
                and self._current_player == other._current_player
                and self._status == other._status
                and self._move_history == other._move_history)

    def __hash__(self):
        return hash((self._grid.tobytes(), self._current_player, self._status, self._move_history))

    def __repr__(self):
        return (f"BoardState(move_count={self.move_count}, "
                f"current_player={self._current_player}, status={self._status!r})")
