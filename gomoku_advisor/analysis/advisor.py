"""
Move advice derived from a board snapshot: immediate wins and blocks,
candidate moves near existing stones, and run-based threats.
"""
from collections import namedtuple

from ..core.board import BLACK, WHITE, EMPTY, opponent
from ..core.coords import BOARD_SIZE, format_move
from ..core.lines import DIRECTIONS, count_direction
from ..core.rules import check_winner

CENTER = "H8"

Threat = namedtuple('Threat', ['move', 'length'])


def _find_winning_cell(state, empty_cells, player):
    for row, col in empty_cells:
        result = check_winner(state.apply(row, col, player))
        if result.has_winner and result.winner == player:
            return (row, col)
    return None


def find_critical_move(state, player):
    """
    Find a move that wins immediately or blocks an immediate loss.

    Every empty cell is tried for ``player`` first (row-major order); if none
    wins, every empty cell is tried for the opponent and the first one that
    would let the opponent win is returned. Only one ply is examined.

    Args:
        state: BoardState to inspect
        player: Side about to move (1 or -1)

    Returns:
        tuple or None: (row, col) of the critical move
    """
    empty_cells = state.get_legal_moves()

    win = _find_winning_cell(state, empty_cells, player)
    if win is not None:
        return win

    return _find_winning_cell(state, empty_cells, opponent(player))


def get_candidate_moves(state, distance=2):
    """
    Empty cells within ``distance`` (Chebyshev) of any stone.

    Args:
        state: BoardState to inspect
        distance (int): Neighborhood radius

    Returns:
        list: Sorted textual coordinates; ["H8"] on an empty board
    """
    grid = state.grid
    stones = [cell for player in (BLACK, WHITE) for cell in state.stones(player)]
    if not stones:
        return [CENTER]

    candidates = set()
    for row, col in stones:
        for r in range(max(0, row - distance), min(BOARD_SIZE, row + distance + 1)):
            for c in range(max(0, col - distance), min(BOARD_SIZE, col + distance + 1)):
                if grid[r, c] == EMPTY:
                    candidates.add(format_move(r, c))

    return sorted(candidates)


def detect_threats(state, player, min_length=3):
    """
    Empty cells that would join ``player`` stones into a long run.

    For each empty cell and direction, stones of ``player`` directly before
    and directly after the cell are counted (up to four each way) and
    summed. Because the count is anchored on the empty cell, broken shapes
    such as ``X X . X X`` are reported at the gap.

    Args:
        state: BoardState to inspect
        player: Side whose runs are counted
        min_length (int): Smallest combined count reported

    Returns:
        list: Threat tuples, longest first; one entry per cell holding the
        longest direction, ties kept in row-major order
    """
    grid = state.grid
    threats = {}

    for row, col in state.get_legal_moves():
        for dr, dc in DIRECTIONS:
            length = (count_direction(grid, row, col, -dr, -dc, player)
                      + count_direction(grid, row, col, dr, dc, player))
            if length < min_length:
                continue
            move = format_move(row, col)
            if threats.get(move, 0) < length:
                threats[move] = length

    ranked = sorted(threats.items(), key=lambda item: -item[1])
    return [Threat(move, length) for move, length in ranked]


def format_threats(threats):
    """Render threats as ``"<coord>(<n>連)"`` strings."""
    return [f"{threat.move}({threat.length}連)" for threat in threats]
