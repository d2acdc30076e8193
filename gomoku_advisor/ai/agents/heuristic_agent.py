"""
Heuristic advisors for Gomoku.

Rule-based stand-ins for the external attack, defense and commander
advisors. Like any advisor they only see the BoardInfo payload; the
position is rebuilt from its stone lists.
"""
import random

import numpy as np

from ...analysis.patterns import (analyze_patterns, SEVERITY, OPEN_FOUR,
                                  BLOCKED_FOUR, OPEN_THREE)
from ...core.board import BoardState, BLACK, WHITE, EMPTY, opponent
from ...core.coords import BOARD_SIZE, format_move, parse_move
from ...core.lines import DIRECTIONS, count_direction
from ..arbiter import Commander, MoveAdvisor
from ..proposals import AttackerProposal, Decision, DefenderProposal


def state_from_board_info(info):
    """Rebuild a BoardState from the stone lists of a BoardInfo."""
    grid = np.zeros((BOARD_SIZE, BOARD_SIZE), dtype=np.int8)
    for player, moves in ((BLACK, info.black_stones), (WHITE, info.white_stones)):
        for move in moves:
            row, col = parse_move(move)
            grid[row, col] = player
    return BoardState(grid, current_player=info.player)


def analyze_line(grid, row, col, player, dr, dc):
    """
    Describe the run ``player`` would get by playing (row, col).

    Returns:
        dict: 'length' of the run including (row, col) and its 'open_ends'
    """
    count_neg = count_direction(grid, row, col, -dr, -dc, player, limit=BOARD_SIZE)
    count_pos = count_direction(grid, row, col, dr, dc, player, limit=BOARD_SIZE)

    open_ends = 0
    for steps, sign in ((count_neg + 1, -1), (count_pos + 1, 1)):
        r, c = row + sign * dr * steps, col + sign * dc * steps
        if 0 <= r < BOARD_SIZE and 0 <= c < BOARD_SIZE and grid[r, c] == EMPTY:
            open_ends += 1

    return {'length': count_neg + 1 + count_pos, 'open_ends': open_ends}


def pattern_score(pattern):
    """
    Score a run by length and open ends; longer runs are worth exponentially more.
    """
    length = pattern['length']
    open_ends = pattern['open_ends']

    if length >= 5:
        return 10000
    elif length == 4:
        return 1000 if open_ends >= 1 else 50  # 4-open vs 4-blocked
    elif length == 3:
        return 100 if open_ends == 2 else (20 if open_ends == 1 else 2)
    elif length == 2:
        return 10 if open_ends == 2 else (3 if open_ends == 1 else 1)
    return 1


def score_move(grid, row, col, player):
    """
    Score a move: shapes created for ``player`` plus shapes denied to the opponent.

    Returns:
        tuple: (score, longest run created)
    """
    score = 0.0
    longest = 0
    for dr, dc in DIRECTIONS:
        ours = analyze_line(grid, row, col, player, dr, dc)
        theirs = analyze_line(grid, row, col, opponent(player), dr, dc)
        score += pattern_score(ours)
        score += pattern_score(theirs) * 0.8  # blocking weighs a little less
        longest = max(longest, ours['length'])
    return score, longest


def _center_distance(move):
    row, col = move
    center = BOARD_SIZE // 2
    return ((row - center) ** 2 + (col - center) ** 2) ** 0.5


def best_scoring_move(state, candidates, player, rng):
    """
    Highest-scoring candidate for ``player``.

    Ties are narrowed to the three closest to the center, then broken at
    random.

    Returns:
        tuple: ((row, col), longest run created) or (None, 0) without candidates
    """
    grid = state.grid
    best_moves = []
    best_score = float('-inf')

    for move in candidates:
        row, col = parse_move(move)
        if grid[row, col] != EMPTY:
            continue
        score, longest = score_move(grid, row, col, player)
        if score > best_score:
            best_score = score
            best_moves = [((row, col), longest)]
        elif score == best_score:
            best_moves.append(((row, col), longest))

    if not best_moves:
        return None, 0

    best_moves.sort(key=lambda item: _center_distance(item[0]))
    return rng.choice(best_moves[:min(3, len(best_moves))])


def _parse_threat(text):
    """Split "H8(4連)" into ("H8", 4)."""
    move, _, rest = text.partition('(')
    return move, int(rest.rstrip(')').rstrip('連'))


class HeuristicAttacker(MoveAdvisor):
    """Proposes the candidate that builds the longest own run."""

    def __init__(self, seed=None):
        self.rng = random.Random(seed)

    async def propose(self, info):
        state = state_from_board_info(info)
        move, longest = best_scoring_move(state, info.candidate_moves, info.player, self.rng)
        if move is None:
            move, longest = best_scoring_move(
                state, [format_move(r, c) for r, c in state.get_legal_moves()], info.player, self.rng)

        if longest >= 4:
            priority = 'high'
        elif longest == 3:
            priority = 'medium'
        else:
            priority = 'low'
        return AttackerProposal(move=format_move(*move),
                                reason=f"Builds a run of {longest} for own stones.",
                                priority=priority)


class HeuristicDefender(MoveAdvisor):
    """
    Proposes the most urgent block.

    Priority order:
    1. Longest opponent threat from the payload
    2. Most severe opponent shape from the pattern analysis
    3. The opponent's best-scoring candidate
    """

    def __init__(self, seed=None):
        self.rng = random.Random(seed)

    async def propose(self, info):
        if info.threats:
            move, length = _parse_threat(info.threats[0])
            return DefenderProposal(
                move=move,
                reason=f"Blocks the opponent's {length}-stone line at its joining cell.",
                threat=f"Opponent joins {length} stones at {move}.",
                priority='critical' if length >= 4 else 'high')

        state = state_from_board_info(info)
        other = opponent(info.player)
        shapes = [p for p in analyze_patterns(state)
                  if p.player == other and p.recommended_moves]
        if shapes:
            shape = min(shapes, key=lambda p: SEVERITY[p.shape])
            move = format_move(*shape.recommended_moves[0])
            if shape.shape in (OPEN_FOUR, BLOCKED_FOUR):
                priority = 'critical'
            elif shape.shape == OPEN_THREE:
                priority = 'high'
            else:
                priority = 'medium'
            return DefenderProposal(move=move, reason=f"Stops the opponent's {shape.shape}.",
                                    threat=shape.description, priority=priority)

        move, _ = best_scoring_move(state, info.candidate_moves, other, self.rng)
        if move is None:
            move, _ = best_scoring_move(
                state, [format_move(r, c) for r, c in state.get_legal_moves()], other, self.rng)
        return DefenderProposal(move=format_move(*move), reason="Takes the opponent's best point.",
                                threat=None, priority='low')


class HeuristicCommander(Commander):
    """Prefers urgent defense, then strong attack, then any defense."""

    async def decide(self, info, attacker, defender):
        if defender.priority == 'critical':
            chosen, comment = defender, "Defense is critical."
        elif attacker.priority == 'high':
            chosen, comment = attacker, "Attack is strong enough to take the initiative."
        elif defender.priority == 'high':
            chosen, comment = defender, "Blocking the opponent's shape first."
        else:
            chosen, comment = attacker, "No urgent threat; building own shape."
        return Decision(move=chosen.move, reason=chosen.reason, comment=comment,
                        adopted_from=chosen.role)
