"""
Textual coordinates for the 15x15 board.

Columns are letters A-O, rows are 1-based numbers 1-15, so the cell at
row 7, column 7 is "H8".
"""
import re

from .errors import MalformedCoordinate

BOARD_SIZE = 15
COLUMNS = "ABCDEFGHIJKLMNO"

_MOVE_RE = re.compile(r"^([A-O])(1[0-5]|[1-9])$", re.IGNORECASE)


def format_move(row, col):
    """
    Convert board indices to a textual coordinate.

    Args:
        row (int): Row index (0-14)
        col (int): Column index (0-14)

    Returns:
        str: Coordinate such as "H8"
    """
    if not (0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE):
        raise ValueError(f"({row}, {col}) is outside the board")
    return f"{COLUMNS[col]}{row + 1}"


def parse_move(text):
    """
    Parse a textual coordinate.

    Args:
        text (str): Input such as "h8" or " H8 "

    Returns:
        tuple: (row, col) indices

    Raises:
        MalformedCoordinate: If the text is not a valid coordinate
    """
    if not isinstance(text, str):
        raise MalformedCoordinate(text)
    match = _MOVE_RE.match(text.strip())
    if not match:
        raise MalformedCoordinate(text)
    col_char, row_str = match.groups()
    return int(row_str) - 1, COLUMNS.index(col_char.upper())


def is_valid_move(text, state):
    """Return True if ``text`` names an empty cell of ``state``."""
    try:
        row, col = parse_move(text)
    except MalformedCoordinate:
        return False
    return state.is_empty(row, col)
