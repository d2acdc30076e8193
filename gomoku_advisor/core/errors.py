"""
Error types raised by the Gomoku advisor.
"""


class GomokuError(Exception):
    """Base class for all errors raised by this package."""


class IllegalMove(GomokuError):
    """
    Raised when a move targets an occupied or out-of-bounds cell.

    Attributes:
        row (int): Requested row
        col (int): Requested column
    """

    def __init__(self, row, col, message):
        super().__init__(message)
        self.row = row
        self.col = col


class MalformedCoordinate(GomokuError, ValueError):
    """Raised when text does not match the coordinate grammar (e.g. "H8")."""

    def __init__(self, text):
        super().__init__(f"Malformed coordinate {text!r} (expected e.g. 'H8')")
        self.text = text


class AdvisorUnavailable(GomokuError):
    """Raised when an external advisor fails or returns an unusable proposal."""

    def __init__(self, role, message):
        super().__init__(f"{role} advisor unavailable: {message}")
        self.role = role
