"""
Tests for BoardState class.
"""
import numpy as np
import pytest
from gomoku_advisor.core.board import (BoardState, BLACK, WHITE, PLAYING, DRAW,
                                       opponent, stone_char)
from gomoku_advisor.core.errors import IllegalMove


def test_board_initialization():
    """Test that a new board is empty with black to move."""
    state = BoardState.create()

    # Check board size
    assert state.size == 15
    assert state.grid.shape == (15, 15)
    assert state.grid.dtype == np.int8

    # Check that all cells are empty (0)
    assert np.all(state.grid == 0)

    assert state.current_player == BLACK
    assert state.status == PLAYING
    assert state.move_history == ()
    assert state.move_count == 0
    assert state.last_move is None


def test_apply_returns_new_state():
    """Test that apply places the stone on a copy and leaves the original alone."""
    state = BoardState.create()

    next_state = state.apply(7, 7, BLACK)

    assert next_state is not state
    assert next_state.grid[7, 7] == BLACK
    assert next_state.current_player == WHITE
    assert next_state.move_history == ("H8",)
    assert next_state.move_count == 1
    assert next_state.last_move == "H8"

    # Original is untouched
    assert np.all(state.grid == 0)
    assert state.move_history == ()
    assert state.current_player == BLACK


def test_apply_twice_from_same_state():
    """Test that repeated apply calls each return an independent successor."""
    state = BoardState.create().apply(0, 0, WHITE)

    first = state.apply(7, 7, BLACK)
    second = state.apply(7, 7, BLACK)

    for result in (first, second):
        assert result.move_count == state.move_count + 1
        assert result.stone_count() == state.stone_count() + 1

    assert first == second
    assert first is not second
    assert state.grid[7, 7] == 0


def test_invalid_move_rejection():
    """Test that out-of-bounds and occupied cells raise IllegalMove."""
    state = BoardState.create()

    for row, col in [(-1, 5), (5, -1), (15, 5), (5, 15), (20, 20)]:
        with pytest.raises(IllegalMove):
            state.apply(row, col, BLACK)

    occupied = state.apply(7, 7, BLACK)
    with pytest.raises(IllegalMove) as excinfo:
        occupied.apply(7, 7, WHITE)
    assert (excinfo.value.row, excinfo.value.col) == (7, 7)

    # Invalid player values
    for player in (0, 2, -2):
        with pytest.raises(ValueError):
            state.apply(5, 5, player)


def test_grid_is_read_only():
    """Test that the grid cannot be modified in place."""
    state = BoardState.create()

    with pytest.raises(ValueError):
        state.grid[0, 0] = BLACK


def test_constructor_copies_grid():
    """Test that later changes to the source array do not leak into the state."""
    source = np.zeros((15, 15), dtype=np.int8)
    source[3, 3] = WHITE
    state = BoardState(source)

    source[3, 3] = BLACK
    source[4, 4] = BLACK

    assert state.grid[3, 3] == WHITE
    assert state.grid[4, 4] == 0


def test_constructor_validation():
    """Test that malformed constructor arguments are rejected."""
    with pytest.raises(ValueError):
        BoardState(np.zeros((9, 9), dtype=np.int8))
    with pytest.raises(ValueError):
        BoardState(np.zeros((15, 15), dtype=np.int8), current_player=0)
    with pytest.raises(ValueError):
        BoardState(np.zeros((15, 15), dtype=np.int8), status='finished')


def test_legal_moves_and_stones():
    """Test legal move and stone listings on a partial board."""
    state = (BoardState.create()
             .apply(7, 7, BLACK)
             .apply(0, 0, WHITE)
             .apply(14, 14, BLACK))

    legal_moves = state.get_legal_moves()
    assert len(legal_moves) == 222
    for pos in [(7, 7), (0, 0), (14, 14)]:
        assert pos not in legal_moves

    # Row-major order
    assert legal_moves[0] == (0, 1)
    assert legal_moves == sorted(legal_moves)

    assert state.stones(BLACK) == [(7, 7), (14, 14)]
    assert state.stones(WHITE) == [(0, 0)]
    assert state.stone_count() == 3
    assert not state.is_full()


def test_with_status():
    """Test that with_status only changes the status tag."""
    state = BoardState.create().apply(7, 7, BLACK)

    finished = state.with_status(DRAW)

    assert finished.status == DRAW
    assert state.status == PLAYING
    assert np.array_equal(finished.grid, state.grid)
    assert finished.move_history == state.move_history
    assert finished.current_player == state.current_player


def test_is_empty_and_bounds():
    """Test cell helpers at the board edges."""
    state = BoardState.create().apply(0, 14, WHITE)

    assert state.in_bounds(0, 0)
    assert state.in_bounds(14, 14)
    assert not state.in_bounds(15, 0)
    assert not state.is_empty(0, 14)
    assert not state.is_empty(-1, 0)
    assert state.is_empty(14, 0)


def test_side_helpers():
    """Test opponent and display helpers."""
    assert opponent(BLACK) == WHITE
    assert opponent(WHITE) == BLACK
    assert stone_char(BLACK) == 'X'
    assert stone_char(WHITE) == 'O'
    assert stone_char(0) == '.'
