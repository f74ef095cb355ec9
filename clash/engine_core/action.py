"""
Action System - Move variants, costs and submitted moves.

Actions represent the one move a participant picks each round:
1. Resource moves (charge, block, boost)
2. Targeted attacks of increasing tier (weak, medium, strong)
3. Counter (turns an incoming attack back on its source)
4. Ultimate (area attack, hits everyone but the caster)

Actions are pure data. The only behavior is the cost lookup.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Iterable

from .errors import DuplicateMoveError

ParticipantId = int


class ActionType(Enum):
    """Move variants a participant can pick."""
    CHARGE = "charge"
    BLOCK = "block"
    ATTACK_WEAK = "attack_weak"
    ATTACK_MEDIUM = "attack_medium"
    BOOST_SELF = "boost_self"
    COUNTER = "counter"
    ATTACK_STRONG = "attack_strong"
    ATTACK_ULTIMATE = "attack_ultimate"

    @property
    def cost(self) -> int:
        return ACTION_COSTS[self]

    @property
    def requires_target(self) -> bool:
        return self in TARGETED_ACTIONS

    @property
    def tier(self) -> int | None:
        """Attack tier (weak < medium < strong < ultimate), None for non-attacks."""
        return ATTACK_TIERS.get(self)


ACTION_COSTS: dict[ActionType, int] = {
    ActionType.CHARGE: 0,
    ActionType.BLOCK: 0,
    ActionType.ATTACK_WEAK: 1,
    ActionType.ATTACK_MEDIUM: 2,
    ActionType.BOOST_SELF: 3,
    ActionType.COUNTER: 4,
    ActionType.ATTACK_STRONG: 5,
    ActionType.ATTACK_ULTIMATE: 7,
}

TARGETED_ACTIONS = frozenset({
    ActionType.ATTACK_WEAK,
    ActionType.ATTACK_MEDIUM,
    ActionType.COUNTER,
    ActionType.ATTACK_STRONG,
})

ATTACK_TIERS: dict[ActionType, int] = {
    ActionType.ATTACK_WEAK: 1,
    ActionType.ATTACK_MEDIUM: 2,
    ActionType.ATTACK_STRONG: 3,
    ActionType.ATTACK_ULTIMATE: 4,
}


@dataclass(frozen=True)
class Action:
    """
    A single move, as chosen by one participant for one round.

    Targeted variants (weak/medium/strong attacks and counter) carry the
    id of the participant they are aimed at. All other variants must
    not carry a target.

    Use the factory methods for construction:
        - Action.charge()
        - Action.attack_weak(target)
        - Action.ultimate()
    """
    action_type: ActionType
    target: ParticipantId | None = None

    def __post_init__(self):
        if self.action_type.requires_target:
            if self.target is None:
                raise ValueError(f"{self.action_type.name} requires a target")
            if not isinstance(self.target, int) or isinstance(self.target, bool):
                raise ValueError(f"target must be an int, got {type(self.target)}")
        elif self.target is not None:
            raise ValueError(f"{self.action_type.name} does not take a target")

    @property
    def cost(self) -> int:
        return cost(self)

    @property
    def tier(self) -> int | None:
        return self.action_type.tier

    @property
    def is_attack(self) -> bool:
        return self.action_type.tier is not None

    def __str__(self) -> str:
        if self.target is None:
            return self.action_type.name
        return f"{self.action_type.name} target={self.target}"

    @classmethod
    def charge(cls) -> Action:
        """Factory for charge action."""
        return cls(ActionType.CHARGE)

    @classmethod
    def block(cls) -> Action:
        """Factory for block action."""
        return cls(ActionType.BLOCK)

    @classmethod
    def attack_weak(cls, target: ParticipantId) -> Action:
        """Factory for weak attack."""
        return cls(ActionType.ATTACK_WEAK, target)

    @classmethod
    def attack_medium(cls, target: ParticipantId) -> Action:
        """Factory for medium attack."""
        return cls(ActionType.ATTACK_MEDIUM, target)

    @classmethod
    def boost_self(cls) -> Action:
        """Factory for self boost."""
        return cls(ActionType.BOOST_SELF)

    @classmethod
    def counter(cls, target: ParticipantId) -> Action:
        """Factory for counter."""
        return cls(ActionType.COUNTER, target)

    @classmethod
    def attack_strong(cls, target: ParticipantId) -> Action:
        """Factory for strong attack."""
        return cls(ActionType.ATTACK_STRONG, target)

    @classmethod
    def ultimate(cls) -> Action:
        """Factory for the area attack."""
        return cls(ActionType.ATTACK_ULTIMATE)


def cost(action: Action) -> int:
    """Charges spent by an action. Depends on the variant only, never on the target."""
    return ACTION_COSTS[action.action_type]


@dataclass(frozen=True)
class PlayerMove:
    """A move as submitted by one participant."""
    player_id: ParticipantId
    choice: Action


def collect_moves(moves: Iterable[PlayerMove]) -> dict[ParticipantId, Action]:
    """
    Fold submitted moves into the round's action map.

    Raises DuplicateMoveError if a participant submitted twice.
    """
    actions: dict[ParticipantId, Action] = {}
    for move in moves:
        if move.player_id in actions:
            raise DuplicateMoveError(move.player_id)
        actions[move.player_id] = move.choice
    return actions
