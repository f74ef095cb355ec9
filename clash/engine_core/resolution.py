"""
Resolution Rules - Decide who dies in a round.

All moves of a round are resolved at the same time against the moves
that were submitted, never against anyone's post-round state. Each
move produces a MoveResult; the kill set is the union of them.

Targeted attacks look up the target's own move in COUNTER_TABLE.
Keeping the table explicit makes every tie-break auditable:

    Counter      - the attacker dies (simple reflect, never chained)
    Same tier    - cancels if aimed back at the attacker, else target dies
    Block        - stops everything except a strong attack
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Mapping, Union

from .action import Action, ActionType, ParticipantId
from .errors import UnknownTargetError


@dataclass(frozen=True)
class NoKill:
    """The move kills nobody."""


@dataclass(frozen=True)
class Kill:
    """The move kills one participant."""
    player_id: ParticipantId


@dataclass(frozen=True)
class AllKill:
    """The move kills everyone except its attacker."""
    attacker: ParticipantId


MoveResult = Union[NoKill, Kill, AllKill]


class Outcome(Enum):
    """Table entries for an attack meeting the target's own move."""
    KILL_TARGET = "kill_target"
    KILL_ACTOR = "kill_actor"
    CLASH = "clash"  # Same tier: cancels only when aimed back at the actor
    NO_KILL = "no_kill"


_WEAK = ActionType.ATTACK_WEAK
_MEDIUM = ActionType.ATTACK_MEDIUM
_STRONG = ActionType.ATTACK_STRONG

# (attack, target's move) -> outcome. Missing pairs are NO_KILL.
COUNTER_TABLE: dict[tuple[ActionType, ActionType], Outcome] = {
    # Weak attack
    (_WEAK, ActionType.CHARGE): Outcome.KILL_TARGET,
    (_WEAK, ActionType.BOOST_SELF): Outcome.KILL_TARGET,
    (_WEAK, ActionType.COUNTER): Outcome.KILL_ACTOR,
    (_WEAK, _WEAK): Outcome.CLASH,
    (_WEAK, _MEDIUM): Outcome.KILL_TARGET,
    (_WEAK, _STRONG): Outcome.KILL_TARGET,
    (_WEAK, ActionType.ATTACK_ULTIMATE): Outcome.KILL_TARGET,
    # Medium attack
    (_MEDIUM, ActionType.CHARGE): Outcome.KILL_TARGET,
    (_MEDIUM, ActionType.BOOST_SELF): Outcome.KILL_TARGET,
    (_MEDIUM, ActionType.COUNTER): Outcome.KILL_ACTOR,
    (_MEDIUM, _WEAK): Outcome.KILL_TARGET,
    (_MEDIUM, _MEDIUM): Outcome.CLASH,
    (_MEDIUM, _STRONG): Outcome.KILL_TARGET,
    (_MEDIUM, ActionType.ATTACK_ULTIMATE): Outcome.KILL_TARGET,
    # Strong attack
    (_STRONG, ActionType.CHARGE): Outcome.KILL_TARGET,
    (_STRONG, ActionType.BOOST_SELF): Outcome.KILL_TARGET,
    (_STRONG, ActionType.COUNTER): Outcome.KILL_ACTOR,
    (_STRONG, ActionType.BLOCK): Outcome.KILL_TARGET,
    (_STRONG, _WEAK): Outcome.KILL_TARGET,
    (_STRONG, _MEDIUM): Outcome.KILL_TARGET,
    (_STRONG, _STRONG): Outcome.CLASH,
}


def lookup_outcome(attack: ActionType, target_move: ActionType) -> Outcome:
    """Table lookup, NO_KILL for any pair the table does not list."""
    return COUNTER_TABLE.get((attack, target_move), Outcome.NO_KILL)


def result_of(
    actor: ParticipantId,
    actor_action: Action,
    all_actions: Mapping[ParticipantId, Action],
) -> MoveResult:
    """
    Resolve one participant's move against everyone's submitted moves.

    Raises UnknownTargetError if the move targets someone with no move.
    """
    if actor_action.action_type == ActionType.ATTACK_ULTIMATE:
        return AllKill(attacker=actor)

    if actor_action.action_type not in (_WEAK, _MEDIUM, _STRONG):
        # Charge, block, boost and counter never kill on their own
        return NoKill()

    target = actor_action.target
    if target not in all_actions:
        raise UnknownTargetError(actor, target)
    target_action = all_actions[target]

    outcome = lookup_outcome(actor_action.action_type, target_action.action_type)
    if outcome == Outcome.KILL_TARGET:
        return Kill(target)
    if outcome == Outcome.KILL_ACTOR:
        return Kill(actor)
    if outcome == Outcome.CLASH:
        if target_action.target == actor:
            return NoKill()
        return Kill(target)
    return NoKill()


def resolve_all(all_actions: Mapping[ParticipantId, Action]) -> dict[ParticipantId, MoveResult]:
    """Resolve every submitted move of the round."""
    return {
        actor: result_of(actor, action, all_actions)
        for actor, action in all_actions.items()
    }


def kill_set(
    results: Iterable[MoveResult],
    roster: Iterable[ParticipantId],
) -> frozenset[ParticipantId]:
    """
    Union of all move results.

    An AllKill hits the whole roster except its attacker, dead or not.
    """
    roster = list(roster)
    killed: set[ParticipantId] = set()
    for result in results:
        if isinstance(result, Kill):
            killed.add(result.player_id)
        elif isinstance(result, AllKill):
            killed.update(p for p in roster if p != result.attacker)
    return frozenset(killed)
