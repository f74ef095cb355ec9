"""
Reducer - Applies one round of simultaneous moves to a game.

The reducer is the single point of state change during play.
All rounds must go through process_round() or apply_round().

Round order:
1. Check the game is playing and every move references the roster
2. Apply each participant's own move (cost, charge gain, boost)
3. Compute the kill set from the submitted moves
4. Apply kills
5. End the game if exactly one participant is left standing

Design principles:
- Pure function: (game, actions) -> new game
- A failed round leaves the input game untouched
- process_round() raises on contract violations, apply_round() reports them
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Mapping

from ..infra.logger import get_logger
from .action import Action, ParticipantId
from .errors import (
    ClashError,
    GameEndedError,
    GameNotPlayingError,
    UnknownParticipantError,
    UnknownTargetError,
)
from .resolution import MoveResult, kill_set, resolve_all
from .state import Game, GamePhase, Participant

log = get_logger(__name__)


@dataclass
class RoundResult:
    """
    Result of processing a round.

    Contains:
    - Whether the round was applied
    - New game (if applied)
    - Who died and why
    - Error details (if rejected)
    """
    success: bool
    new_state: Game | None = None
    error: str | None = None
    error_code: str | None = None

    killed: frozenset[ParticipantId] = frozenset()
    outcomes: dict[ParticipantId, MoveResult] = field(default_factory=dict)
    winner: ParticipantId | None = None

    # For presentation
    changes: list[str] = field(default_factory=list)

    @classmethod
    def failure(cls, error: str, error_code: str | None = None) -> RoundResult:
        """Create a failure result."""
        return cls(success=False, error=error, error_code=error_code)


@dataclass
class RoundEngine:
    """
    Resolves rounds. Stateless - all state is in Game.

    Affordability is not checked here: callers are expected to submit
    only moves that pass Participant.can_afford. A move that cannot be
    paid for still fails loudly with InsufficientChargeError.
    """

    def process_round(self, game: Game, actions: Mapping[ParticipantId, Action]) -> RoundResult:
        """
        Apply one round and return the result.

        Raises a ClashError subclass on any precondition violation.
        """
        self._validate_round(game, actions)
        # Freeze the submitted moves; resolution never sees later changes
        submitted = dict(actions)

        players = dict(game.players)
        changes: list[str] = []

        for player_id, action in submitted.items():
            before = players[player_id]
            after = before.apply_completion(action)
            players[player_id] = after
            changes.extend(_describe_completion(before, after))

        outcomes = resolve_all(submitted)
        killed = kill_set(outcomes.values(), players.keys())
        log.debug("Game %s round %d kill set: %s", game.game_id, game.round_number + 1, sorted(killed))

        for player_id in sorted(killed):
            before = players[player_id]
            after = before.kill()
            players[player_id] = after
            changes.extend(_describe_kill(before, after))

        new_game = game._copy_with(players=players, round_number=game.round_number + 1)
        winner = _sole_survivor(players)
        if winner is not None:
            new_game = new_game._copy_with(phase=GamePhase.ENDED, winner=winner)
            changes.append(f"{players[winner].name} wins")
            log.info("Game %s ended after %d round(s), winner %s", game.game_id, new_game.round_number, winner)

        return RoundResult(
            success=True,
            new_state=new_game,
            killed=killed,
            outcomes=outcomes,
            winner=winner,
            changes=changes,
        )

    def apply(self, game: Game, actions: Mapping[ParticipantId, Action]) -> RoundResult:
        """Apply one round, reporting contract violations in the result instead of raising."""
        try:
            return self.process_round(game, actions)
        except ClashError as e:
            log.warning("Game %s round rejected: %s", game.game_id, e)
            return RoundResult.failure(str(e), error_code=e.error_code)

    def _validate_round(self, game: Game, actions: Mapping[ParticipantId, Action]) -> None:
        if game.phase == GamePhase.ENDED:
            raise GameEndedError(f"Game {game.game_id} has already ended")
        if game.phase != GamePhase.PLAYING:
            raise GameNotPlayingError(f"Game {game.game_id} has not started")

        for player_id, action in actions.items():
            if player_id not in game.players:
                raise UnknownParticipantError(player_id)
            if action.target is not None and (
                action.target not in game.players or action.target not in actions
            ):
                raise UnknownTargetError(player_id, action.target)


def _sole_survivor(players: Mapping[ParticipantId, Participant]) -> ParticipantId | None:
    alive = [p.id for p in players.values() if not p.is_dead()]
    if len(alive) == 1:
        return alive[0]
    return None


def _describe_completion(before: Participant, after: Participant) -> list[str]:
    changes = []
    if after.charges != before.charges:
        changes.append(f"{before.name} charges {before.charges} -> {after.charges}")
    if after.is_boosted and not before.is_boosted:
        changes.append(f"{before.name} is boosted")
    return changes


def _describe_kill(before: Participant, after: Participant) -> list[str]:
    if after.is_dead() and not before.is_dead():
        return [f"{before.name} dies"]
    if before.is_boosted and not after.is_boosted:
        return [f"{before.name} loses the boost"]
    return []


_default_engine = RoundEngine()


def process_round(game: Game, actions: Mapping[ParticipantId, Action]) -> RoundResult:
    """Convenience function: apply a round, raising on contract violations."""
    return _default_engine.process_round(game, actions)


def apply_round(game: Game, actions: Mapping[ParticipantId, Action]) -> RoundResult:
    """Convenience function: apply a round, returning a failure result on contract violations."""
    return _default_engine.apply(game, actions)
