"""
Random agent for Gomoku.
"""
import random

from ...core.coords import format_move


class RandomAgent:
    """
    An agent that plays random legal moves.

    Used as the last resort when no advisor produced a usable move: it
    selects uniformly at random from all empty cells.
    """

    def __init__(self, seed=None):
        """
        Initialize the random agent.

        Args:
            seed (int, optional): Random seed for reproducible behavior
        """
        self.rng = random.Random(seed)

    def select_action(self, state):
        """
        Select a random empty cell.

        Args:
            state: BoardState to move on

        Returns:
            str: Textual coordinate of the selected move, or None if the
            board is full
        """
        legal_moves = state.get_legal_moves()

        if not legal_moves:
            return None

        row, col = self.rng.choice(legal_moves)
        return format_move(row, col)
