"""
Pattern classification over 5-cell windows.

Every window of five consecutive cells (in the four line directions) is
classified per side into one of the shapes below. Windows holding any
opponent stone carry no shape. Results are recomputed from the board on
every call.
"""
from collections import namedtuple

from ..core.board import BLACK, WHITE, EMPTY, opponent, stone_char
from ..core.coords import BOARD_SIZE, format_move
from ..core.lines import DIRECTIONS, WIN_LENGTH

FIVE = 'Five'
OPEN_FOUR = 'OpenFour'
BLOCKED_FOUR = 'BlockedFour'
OPEN_THREE = 'OpenThree'
BLOCKED_THREE = 'BlockedThree'

# Lower rank = more severe
SEVERITY = {
    FIVE: 0,
    OPEN_FOUR: 1,
    BLOCKED_FOUR: 2,
    OPEN_THREE: 3,
    BLOCKED_THREE: 4,
}

DIRECTION_NAMES = {
    (0, 1): 'horizontal',
    (1, 0): 'vertical',
    (1, 1): 'diagonal ↘',
    (1, -1): 'diagonal ↙',
}

Pattern = namedtuple('Pattern', [
    'shape',              # one of the shape constants above
    'player',             # owner (1 or -1)
    'window',             # the five (row, col) cells examined
    'stones',             # owner's stones inside the window
    'recommended_moves',  # cells that complete or extend the shape
    'description',
])


def _is_open(grid, cell):
    row, col = cell
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE and grid[row, col] == EMPTY


def _classify_window(grid, row, col, dr, dc, player):
    """
    Classify the window starting at (row, col) for ``player``.

    Returns:
        Pattern or None
    """
    end_row, end_col = row + dr * (WIN_LENGTH - 1), col + dc * (WIN_LENGTH - 1)
    if not (0 <= end_row < BOARD_SIZE and 0 <= end_col < BOARD_SIZE):
        return None

    window = [(row + dr * i, col + dc * i) for i in range(WIN_LENGTH)]
    cells = [grid[r, c] for r, c in window]
    if opponent(player) in cells:
        return None

    stones = [cell for cell, value in zip(window, cells) if value == player]
    empties = [cell for cell, value in zip(window, cells) if value == EMPTY]
    before = (row - dr, col - dc)
    after = (row + dr * WIN_LENGTH, col + dc * WIN_LENGTH)
    name = DIRECTION_NAMES[(dr, dc)]

    if len(stones) == 5:
        return Pattern(FIVE, player, window, stones, [],
                       f"Five in a row ({name}); the game is won.")

    if len(stones) == 4:
        gap = empties[0]
        gap_index = window.index(gap)
        if gap_index == 0 or gap_index == WIN_LENGTH - 1:
            # Contiguous four: openness is judged at the run's own ends, the
            # gap on one side and the cell beyond the window on the other, not
            # at the two cells flanking the window. O.XXXX.O is an open four.
            if gap_index == 0:
                ends = [gap, after] if _is_open(grid, after) else [gap]
            else:
                ends = [before, gap] if _is_open(grid, before) else [gap]
            if len(ends) == 2:
                return Pattern(OPEN_FOUR, player, window, stones, ends,
                               f"Open four ({name}) with both ends free; it cannot be stopped.")
            return Pattern(BLOCKED_FOUR, player, window, stones, ends,
                           f"Four ({name}) blocked on one end.")
        return Pattern(BLOCKED_FOUR, player, window, stones, [gap],
                       f"Broken four ({name}); the gap completes five.")

    if len(stones) == 3:
        before_open = _is_open(grid, before)
        after_open = _is_open(grid, after)
        if not (before_open or after_open):
            return None
        recommended = list(empties)
        if before_open:
            recommended.append(before)
        if after_open:
            recommended.append(after)
        if before_open and after_open:
            return Pattern(OPEN_THREE, player, window, stones, recommended,
                           f"Open three ({name}); it can become an open four.")
        return Pattern(BLOCKED_THREE, player, window, stones, recommended,
                       f"Three ({name}) blocked on one end.")

    return None


def analyze_patterns(state):
    """
    Find every shape on the board for both sides.

    Detections of the same shape, owner and stone set coming from
    different windows are reported once (the first one found, scanning
    black before white, rows, columns, then directions).

    Args:
        state: BoardState to analyze

    Returns:
        list: Pattern tuples
    """
    grid = state.grid
    patterns = []
    seen = set()

    for player in (BLACK, WHITE):
        for row in range(BOARD_SIZE):
            for col in range(BOARD_SIZE):
                for dr, dc in DIRECTIONS:
                    pattern = _classify_window(grid, row, col, dr, dc, player)
                    if pattern is None:
                        continue
                    key = (pattern.shape, player, frozenset(pattern.stones))
                    if key in seen:
                        continue
                    seen.add(key)
                    patterns.append(pattern)

    return patterns


def _format_pattern(pattern, label):
    if pattern.recommended_moves:
        moves = ", ".join(format_move(r, c) for r, c in pattern.recommended_moves)
    else:
        moves = "already won"
    return f"- [{pattern.shape}] {pattern.description}\n  -> {label}: {moves}\n"


def generate_analysis_text(state, perspective=None):
    """
    Summarize the board's patterns as text for the advisors.

    Args:
        state: BoardState to analyze
        perspective (int, optional): Side the advisors play for; defaults
            to the side to move. Opponent shapes are listed as cells to
            block, own shapes as cells to attack.

    Returns:
        str: Multi-line summary, most severe shapes first within each side
    """
    patterns = analyze_patterns(state)
    if not patterns:
        return "No notable patterns found."

    own = perspective if perspective is not None else state.current_player
    other = opponent(own)
    by_severity = lambda p: SEVERITY[p.shape]
    own_patterns = sorted((p for p in patterns if p.player == own), key=by_severity)
    other_patterns = sorted((p for p in patterns if p.player == other), key=by_severity)

    text = "Pattern analysis\n"

    if other_patterns:
        text += f"Opponent ({stone_char(other)}) shapes to stop:\n"
        for p in other_patterns:
            text += _format_pattern(p, "block at")
    else:
        text += f"Opponent ({stone_char(other)}) has no shapes that need blocking.\n"

    text += "\n"

    if own_patterns:
        text += f"Own ({stone_char(own)}) shapes to build on:\n"
        for p in own_patterns:
            text += _format_pattern(p, "attack at")
    else:
        text += f"Own ({stone_char(own)}) has no notable chances.\n"

    return text
