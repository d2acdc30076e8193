"""
Game session for Gomoku.
"""
import logging

from .board import BoardState, BLACK, WHITE, BLACK_WIN, WHITE_WIN, DRAW, PLAYING
from .coords import parse_move
from .errors import IllegalMove
from .rules import status_after_move

logger = logging.getLogger(__name__)


class Game:
    """
    Manages a Gomoku game session.

    Holds the current BoardState and replaces it with the successor after
    every move. Previous states are never modified, so callers holding an
    older snapshot keep a stable view.
    """

    def __init__(self, state=None):
        """
        Initialize a new Gomoku game.

        Args:
            state (BoardState, optional): Position to resume from
        """
        self.state = state if state is not None else BoardState.create()

    @property
    def current_player(self):
        return self.state.current_player

    @property
    def game_state(self):
        """
        Get the current game state.

        Returns:
            str: One of 'ongoing', 'win', 'draw'
        """
        if self.state.status in (BLACK_WIN, WHITE_WIN):
            return 'win'
        elif self.state.status == DRAW:
            return 'draw'
        else:
            return 'ongoing'

    @property
    def winner(self):
        """
        Get the winner of the game.

        Returns:
            int or None: Winner (1 for black, -1 for white) or None if no winner
        """
        if self.state.status == BLACK_WIN:
            return BLACK
        if self.state.status == WHITE_WIN:
            return WHITE
        return None

    def make_move(self, move):
        """
        Play a move for the current player.

        Args:
            move: Textual coordinate ("H8") or (row, col) tuple

        Returns:
            BoardState: The new state

        Raises:
            MalformedCoordinate: If a textual move cannot be parsed
            IllegalMove: If the cell is taken, off the board, or the game is over
        """
        row, col = parse_move(move) if isinstance(move, str) else move

        if self.state.status != PLAYING:
            raise IllegalMove(row, col, f"game is already over ({self.state.status})")

        player = self.state.current_player
        next_state = self.state.apply(row, col, player)
        status = status_after_move(next_state)
        if status != PLAYING:
            next_state = next_state.with_status(status)
            logger.info("Game over after %d moves: %s", next_state.move_count, status)

        self.state = next_state
        return next_state
