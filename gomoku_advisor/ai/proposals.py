"""
Value types exchanged with the move advisors.

Advisor and commander responses are untrusted, so every response is
re-validated with the pydantic models below before the arbiter uses it.
"""
from typing import ClassVar, Literal, Optional

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from ..core.errors import AdvisorUnavailable

ATTACKER = 'attacker'
DEFENDER = 'defender'
COMMANDER = 'commander'
OWN = 'own'


def _describe(exc):
    return "; ".join(f"{'.'.join(str(part) for part in error['loc']) or 'response'}: {error['msg']}"
                     for error in exc.errors())


def _validate(model, data, role):
    if isinstance(data, BaseModel):
        data = data.model_dump()
    try:
        return model.model_validate(data)
    except ValidationError as exc:
        raise AdvisorUnavailable(role, f"malformed response ({_describe(exc)})") from exc


class Proposal(BaseModel):
    """
    A move suggested by an attack- or defense-oriented advisor.

    The arbiter still checks that ``move`` names an empty cell before
    using it.
    """
    model_config = ConfigDict(frozen=True)

    role: ClassVar[str]

    move: str
    reason: str

    @field_validator('move')
    @classmethod
    def _clean_move(cls, value):
        value = value.strip().upper()
        if not value:
            raise ValueError("move is blank")
        return value

    @classmethod
    def from_dict(cls, data, role):
        """
        Parse and validate an advisor response.

        Args:
            data (dict or Proposal): Response with 'move', 'reason',
                'priority' and, for defenders, an optional 'threat'
            role (str): 'attacker' or 'defender'

        Returns:
            AttackerProposal or DefenderProposal

        Raises:
            AdvisorUnavailable: If the response does not match the model for
                ``role``
        """
        if role not in PROPOSAL_MODELS:
            raise ValueError(f"unknown advisor role {role!r}")
        return _validate(PROPOSAL_MODELS[role], data, role)


class AttackerProposal(Proposal):
    role: ClassVar[str] = ATTACKER

    priority: Literal['high', 'medium', 'low']


class DefenderProposal(Proposal):
    role: ClassVar[str] = DEFENDER

    threat: Optional[str] = None
    priority: Literal['critical', 'high', 'medium', 'low']


PROPOSAL_MODELS = {ATTACKER: AttackerProposal, DEFENDER: DefenderProposal}


class Decision(BaseModel):
    """The final move and which proposal it came from."""
    model_config = ConfigDict(frozen=True)

    move: str
    reason: str
    comment: str
    adopted_from: Literal['attacker', 'defender', 'own']

    @classmethod
    def from_dict(cls, data):
        """
        Parse and validate a commander response.

        Raises:
            AdvisorUnavailable: If the response is malformed
        """
        return _validate(cls, data, COMMANDER)
