"""
Request payload handed to the move advisors.

Advisors never receive the grid itself: they get a text rendering, the
stone lists, the candidate moves, the pattern summary and the opponent's
threats.
"""
from collections import namedtuple

from ..core.board import BLACK, WHITE, opponent, stone_char
from ..core.coords import BOARD_SIZE, COLUMNS, format_move
from .advisor import detect_threats, format_threats, get_candidate_moves
from .patterns import generate_analysis_text

_BoardInfoFields = namedtuple('BoardInfo', [
    'board_text',
    'last_move',
    'move_count',
    'player',           # side the advisors play for
    'black_stones',
    'white_stones',
    'candidate_moves',
    'analysis_text',
    'threats',          # opponent threats, "<coord>(<n>連)"
])


class BoardInfo(_BoardInfoFields):
    __slots__ = ()

    def to_dict(self):
        """Plain-dict form for serialization."""
        return dict(self._asdict())


def render_board(state):
    """
    Render the board as fixed-width text.

    Columns are labelled A-O across the top and rows 1-15 down the left.
    Cells are '.', 'X' (black) and 'O' (white).
    """
    lines = ["   " + " ".join(COLUMNS[:BOARD_SIZE])]
    for row in range(BOARD_SIZE):
        cells = " ".join(stone_char(value) for value in state.grid[row])
        lines.append(f"{row + 1:>2} {cells}")
    return "\n".join(lines)


def stone_positions(state, player):
    """Textual coordinates of ``player``'s stones in row-major order."""
    return [format_move(row, col) for row, col in state.stones(player)]


def create_board_info(state, player=None, candidate_distance=2, threat_min_length=3):
    """
    Build the advisor payload for ``player``.

    Args:
        state: BoardState to describe
        player (int, optional): Side the advisors play for; defaults to the
            side to move
        candidate_distance (int): Neighborhood radius for candidate moves
        threat_min_length (int): Smallest opponent run reported as a threat

    Returns:
        BoardInfo
    """
    if player is None:
        player = state.current_player
    threats = detect_threats(state, opponent(player), min_length=threat_min_length)
    return BoardInfo(
        board_text=render_board(state),
        last_move=state.last_move or "",
        move_count=state.move_count,
        player=player,
        black_stones=stone_positions(state, BLACK),
        white_stones=stone_positions(state, WHITE),
        candidate_moves=get_candidate_moves(state, candidate_distance),
        analysis_text=generate_analysis_text(state, perspective=player),
        threats=format_threats(threats),
    )

