"""
Directional line scanning shared by the win detector and the analysis code.
"""
from .coords import BOARD_SIZE
from .board import EMPTY

# Horizontal, vertical, diagonal (↘) and anti-diagonal (↙). Each axis is
# listed once; scans along the opposite sign start from the other end.
DIRECTIONS = (
    (0, 1),
    (1, 0),
    (1, 1),
    (1, -1),
)

WIN_LENGTH = 5


def scan_line(grid, row, col, dr, dc, limit=WIN_LENGTH):
    """
    Collect the run of stones matching the origin's owner.

    Args:
        grid: 15x15 cell array
        row, col: Origin cell
        dr, dc: Direction step
        limit (int): Maximum run length to collect

    Returns:
        list: (row, col) tuples starting at the origin, at most ``limit``
        long; empty when the origin cell is empty
    """
    owner = grid[row, col]
    if owner == EMPTY:
        return []

    line = []
    r, c = row, col
    while (len(line) < limit and 0 <= r < BOARD_SIZE and 0 <= c < BOARD_SIZE
           and grid[r, c] == owner):
        line.append((r, c))
        r, c = r + dr, c + dc
    return line


def count_direction(grid, row, col, dr, dc, player, limit=4):
    """
    Count ``player`` stones stepping away from (row, col), excluding it.

    Stops at the first cell that is off the board or not owned by
    ``player``, or after ``limit`` stones.
    """
    count = 0
    r, c = row + dr, col + dc
    while (count < limit and 0 <= r < BOARD_SIZE and 0 <= c < BOARD_SIZE
           and grid[r, c] == player):
        count += 1
        r, c = r + dr, c + dc
    return count
