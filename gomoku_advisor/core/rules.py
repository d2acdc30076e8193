"""
Win detection and game-status rules.
"""
from collections import namedtuple

from .board import BLACK, BLACK_WIN, WHITE_WIN, DRAW, PLAYING, EMPTY
from .coords import BOARD_SIZE
from .lines import DIRECTIONS, WIN_LENGTH, scan_line

WinCheckResult = namedtuple('WinCheckResult', ['has_winner', 'winner', 'winning_line'])

NO_WINNER = WinCheckResult(False, None, None)

MAX_MOVES = BOARD_SIZE * BOARD_SIZE


def check_winner(state):
    """
    Scan the whole board for five in a row.

    Every stone is used as an origin in all four directions; the first run
    reaching five stones decides the winner. Runs longer than five also win
    since the scan stops after five stones.

    Args:
        state: BoardState to inspect

    Returns:
        WinCheckResult: (True, player, [5 (row, col) tuples]) or NO_WINNER
    """
    grid = state.grid
    for row in range(BOARD_SIZE):
        for col in range(BOARD_SIZE):
            if grid[row, col] == EMPTY:
                continue
            for dr, dc in DIRECTIONS:
                line = scan_line(grid, row, col, dr, dc)
                if len(line) == WIN_LENGTH:
                    return WinCheckResult(True, int(grid[row, col]), line)
    return NO_WINNER


def status_after_move(state):
    """
    Derive the status tag for a state that was just produced by a move.

    Returns:
        str: 'black_win', 'white_win', 'draw' or 'playing'
    """
    result = check_winner(state)
    if result.has_winner:
        return BLACK_WIN if result.winner == BLACK else WHITE_WIN
    if state.move_count >= MAX_MOVES or state.is_full():
        return DRAW
    return PLAYING
