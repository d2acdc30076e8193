"""
Decision arbiter: turns advisor proposals and the rule-based critical move
search into a single move.

Priority order:
1. A critical move (immediate win, else immediate block) is always played
2. Proposals naming an occupied, off-board or unparsable cell are dropped
3. No usable proposal - a random empty cell
4. One usable proposal - adopted as-is
5. Two usable proposals - the commander chooses
"""
import asyncio
import logging
from abc import ABC, abstractmethod

from ..analysis.advisor import find_critical_move
from ..analysis.board_info import create_board_info
from ..config import ArbiterConfig
from ..core.coords import format_move, parse_move
from ..core.errors import AdvisorUnavailable, MalformedCoordinate
from .agents.random_agent import RandomAgent
from .proposals import ATTACKER, COMMANDER, DEFENDER, OWN, Decision, Proposal

logger = logging.getLogger(__name__)


class MoveAdvisor(ABC):
    """An attack- or defense-oriented source of proposals."""

    @abstractmethod
    async def propose(self, info):
        """
        Suggest a move.

        Args:
            info (BoardInfo): Description of the position

        Returns:
            Proposal or dict: The suggestion; either form is validated
            with Proposal.from_dict
        """


class Commander(ABC):
    """Chooses between two valid proposals."""

    @abstractmethod
    async def decide(self, info, attacker, defender):
        """
        Pick the final move.

        Returns:
            Decision or dict with 'move', 'reason', 'comment', 'adopted_from'
        """


def _normalize_move(move, state, role):
    try:
        row, col = parse_move(move)
    except MalformedCoordinate as exc:
        raise AdvisorUnavailable(role, f"unparsable move {move!r}") from exc
    if not state.is_empty(row, col):
        raise AdvisorUnavailable(role, f"{move} is not an empty cell")
    return format_move(row, col)


class DecisionArbiter:
    """
    Chooses the next move for one side.

    Attacker and defender are consulted concurrently; the arbiter waits for
    both before applying the priority order above.
    """

    def __init__(self, attacker=None, defender=None, commander=None, config=None):
        """
        Args:
            attacker (MoveAdvisor, optional): Attack-oriented advisor
            defender (MoveAdvisor, optional): Defense-oriented advisor
            commander (Commander, optional): Tie-breaker for two valid proposals
            config (ArbiterConfig, optional): Settings; defaults if omitted
        """
        self.attacker = attacker
        self.defender = defender
        self.commander = commander
        self.config = config or ArbiterConfig()
        self.random_agent = RandomAgent(seed=self.config.seed)

    async def decide(self, state, player=None):
        """
        Choose a move for ``player`` (default: the side to move).

        Returns:
            Decision

        Raises:
            RuntimeError: If the board has no empty cell
        """
        if player is None:
            player = state.current_player

        critical = find_critical_move(state, player)
        if critical is not None:
            move = format_move(*critical)
            logger.info("Critical move %s for player %d", move, player)
            return Decision(move=move,
                            reason="Immediate win or forced block (rule-based).",
                            comment="A five can be completed or must be stopped on this move.",
                            adopted_from=OWN)

        info = create_board_info(state, player,
                                 candidate_distance=self.config.candidate_distance,
                                 threat_min_length=self.config.threat_min_length)

        attacker, defender = await asyncio.gather(
            self._request(self.attacker, ATTACKER, info, state),
            self._request(self.defender, DEFENDER, info, state),
        )

        if attacker is None and defender is None:
            return self._random_decision(state)

        if defender is None:
            return Decision(move=attacker.move, reason=attacker.reason,
                            comment="Defender proposal unusable; attacker adopted.",
                            adopted_from=ATTACKER)
        if attacker is None:
            return Decision(move=defender.move, reason=defender.reason,
                            comment="Attacker proposal unusable; defender adopted.",
                            adopted_from=DEFENDER)

        return await self._delegate(info, state, attacker, defender)

    def decide_sync(self, state, player=None):
        """Blocking wrapper around :meth:`decide`."""
        return asyncio.run(self.decide(state, player))

    async def _request(self, advisor, role, info, state):
        """Ask one advisor; any failure yields None."""
        if advisor is None:
            return None
        try:
            proposal = Proposal.from_dict(await advisor.propose(info), role)
            move = _normalize_move(proposal.move, state, role)
        except AdvisorUnavailable as exc:
            logger.warning("%s", exc)
            return None
        except Exception as exc:
            logger.warning("%s advisor failed: %s", role, exc)
            return None
        logger.debug("%s proposes %s (%s)", role, move, proposal.priority)
        return proposal.model_copy(update={'move': move})

    async def _delegate(self, info, state, attacker, defender):
        if self.commander is not None:
            try:
                decision = Decision.from_dict(
                    await self.commander.decide(info, attacker, defender))
                move = _normalize_move(decision.move, state, COMMANDER)
                return decision.model_copy(update={'move': move})
            except AdvisorUnavailable as exc:
                logger.warning("%s", exc)
            except Exception as exc:
                logger.warning("commander failed: %s", exc)

        fallback = defender if self.config.commander_fallback == DEFENDER else attacker
        logger.info("No commander decision; falling back to %s proposal %s",
                    fallback.role, fallback.move)
        return Decision(move=fallback.move, reason=fallback.reason,
                        comment=f"Commander unavailable; {fallback.role} adopted.",
                        adopted_from=fallback.role)

    def _random_decision(self, state):
        move = self.random_agent.select_action(state)
        if move is None:
            raise RuntimeError("no empty cell left to play")
        logger.info("No usable proposal; random move %s", move)
        return Decision(move=move, reason="No usable proposal; random empty cell.",
                        comment="Both advisors failed, so an empty cell was picked at random.",
                        adopted_from=OWN)
