"""
Tests for the heuristic advisors.
"""
import asyncio
import numpy as np
from gomoku_advisor.core.board import BoardState, BLACK, WHITE
from gomoku_advisor.core.coords import parse_move
from gomoku_advisor.analysis.board_info import create_board_info
from gomoku_advisor.ai.proposals import (Proposal, AttackerProposal, DefenderProposal, Decision,
                                         ATTACKER, DEFENDER)
from gomoku_advisor.ai.agents.heuristic_agent import (HeuristicAttacker, HeuristicDefender,
                                                      HeuristicCommander, state_from_board_info,
                                                      analyze_line, pattern_score)


def make_state(black=(), white=(), current_player=BLACK):
    grid = np.zeros((15, 15), dtype=np.int8)
    for row, col in black:
        grid[row, col] = BLACK
    for row, col in white:
        grid[row, col] = WHITE
    return BoardState(grid, current_player=current_player)


def test_state_from_board_info():
    """Test that the stone lists rebuild the same position."""
    state = make_state(black=[(7, 7), (3, 2)], white=[(0, 14)], current_player=WHITE)

    rebuilt = state_from_board_info(create_board_info(state))

    assert np.array_equal(rebuilt.grid, state.grid)
    assert rebuilt.current_player == WHITE


def test_analyze_line():
    """Test run length and open-end counting."""
    state = make_state(black=[(7, 5), (7, 6)], white=[(7, 4)])

    pattern = analyze_line(state.grid, 7, 7, BLACK, 0, 1)

    assert pattern == {'length': 3, 'open_ends': 1}


def test_pattern_score_ordering():
    """Test that longer and more open runs score higher."""
    assert pattern_score({'length': 5, 'open_ends': 0}) > pattern_score({'length': 4, 'open_ends': 2})
    assert pattern_score({'length': 4, 'open_ends': 1}) > pattern_score({'length': 3, 'open_ends': 2})
    assert pattern_score({'length': 3, 'open_ends': 2}) > pattern_score({'length': 3, 'open_ends': 1})
    assert pattern_score({'length': 2, 'open_ends': 2}) > pattern_score({'length': 1, 'open_ends': 2})


def test_attacker_extends_open_three():
    """Test that the attacker turns an open three into a four."""
    state = make_state(black=[(7, 6), (7, 7), (7, 8)], white=[(0, 0)])
    info = create_board_info(state, BLACK)

    proposal = asyncio.run(HeuristicAttacker(seed=42).propose(info))

    assert isinstance(proposal, Proposal)
    assert proposal.role == ATTACKER
    assert proposal.move in ("F8", "J8")
    assert proposal.priority == 'high'
    assert proposal.move in info.candidate_moves


def test_attacker_opening_move():
    """Test that the attacker plays the center on an empty board."""
    info = create_board_info(BoardState.create(), BLACK)

    proposal = asyncio.run(HeuristicAttacker(seed=1).propose(info))

    assert proposal.move == "H8"
    assert proposal.priority == 'low'


def test_defender_blocks_longest_threat():
    """Test that the defender blocks the first listed threat."""
    state = make_state(black=[(7, 6), (7, 7), (7, 8)], white=[(0, 0)], current_player=WHITE)
    info = create_board_info(state, WHITE)

    proposal = asyncio.run(HeuristicDefender(seed=42).propose(info))

    assert proposal.role == DEFENDER
    assert proposal.move == "F8"
    assert proposal.priority == 'high'
    assert proposal.threat is not None


def test_defender_marks_four_critical():
    """Test that a four-stone threat is critical."""
    state = make_state(black=[(7, 3), (7, 4), (7, 6), (7, 7)], current_player=WHITE)

    proposal = asyncio.run(HeuristicDefender().propose(create_board_info(state, WHITE)))

    assert proposal.move == "F8"
    assert proposal.priority == 'critical'


def test_defender_uses_patterns_without_threats():
    """Test that a split three is blocked from the pattern analysis."""
    state = make_state(black=[(7, 5), (7, 7), (7, 9)], current_player=WHITE)
    info = create_board_info(state, WHITE)
    assert info.threats == []

    proposal = asyncio.run(HeuristicDefender().propose(info))

    assert proposal.move == "G8"
    assert proposal.priority == 'high'


def test_defender_quiet_position():
    """Test a low-priority proposal when nothing needs blocking."""
    state = make_state(black=[(7, 7)], current_player=WHITE)
    info = create_board_info(state, WHITE)

    proposal = asyncio.run(HeuristicDefender(seed=3).propose(info))

    assert proposal.priority == 'low'
    assert proposal.threat is None
    assert proposal.move in info.candidate_moves
    row, col = parse_move(proposal.move)
    assert state.grid[row, col] == 0


def test_commander_priorities():
    """Test which proposal the commander adopts."""
    commander = HeuristicCommander()
    info = create_board_info(BoardState.create())

    def decide(attack_priority, defend_priority):
        attacker = AttackerProposal(move="A1", reason="attack", priority=attack_priority)
        defender = DefenderProposal(move="B2", reason="defend", priority=defend_priority)
        return asyncio.run(commander.decide(info, attacker, defender))

    critical = decide('high', 'critical')
    assert isinstance(critical, Decision)
    assert (critical.move, critical.adopted_from) == ("B2", DEFENDER)
    assert decide('high', 'high').adopted_from == ATTACKER
    assert decide('medium', 'high').adopted_from == DEFENDER
    assert decide('low', 'medium').adopted_from == ATTACKER
