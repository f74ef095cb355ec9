"""
Game State - Participants and the game they belong to.

Design principles:
- Immutable-friendly: all transitions return new values
- Fixed roster: dead participants stay in the game as Dead
- The Game owns its participants; nothing else holds them
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum

from .action import Action, ActionType, ParticipantId, cost
from .errors import (
    DuplicateParticipantError,
    GameAlreadyStartedError,
    GameEndedError,
    InsufficientChargeError,
)


class LifeState(Enum):
    """Life state of a participant."""
    ALIVE = "alive"
    BOOSTED = "boosted"  # One extra life, double charge gain
    DEAD = "dead"


class GamePhase(Enum):
    """High-level game phases."""
    SETUP = "setup"
    PLAYING = "playing"
    ENDED = "ended"


@dataclass(frozen=True)
class Participant:
    """
    One fighter in the game.

    Charges are the resource spent on moves. A Dead participant always
    has zero charges and never comes back.
    """
    id: ParticipantId
    name: str
    charges: int = 0
    state: LifeState = LifeState.ALIVE

    def can_afford(self, action: Action) -> bool:
        """
        Check whether this participant may submit an action.

        Boosting again while already boosted is not allowed.
        """
        if action.action_type == ActionType.BOOST_SELF:
            return self.state == LifeState.ALIVE and self.charges >= cost(action)
        return self.state != LifeState.DEAD and self.charges >= cost(action)

    def apply_completion(self, action: Action) -> Participant:
        """
        Return the participant after its own move has been played.

        The cost is deducted first, then the variant effect applies.
        Raises InsufficientChargeError instead of going below zero.
        """
        price = cost(action)
        if price > self.charges:
            raise InsufficientChargeError(self.id, self.charges, price)
        charges = self.charges - price
        state = self.state

        if action.action_type == ActionType.CHARGE:
            charges += self._charge_gain()
        elif action.action_type == ActionType.BOOST_SELF and state != LifeState.DEAD:
            state = LifeState.BOOSTED

        return self._copy_with(charges=charges, state=state)

    def kill(self) -> Participant:
        """Boosted drops to Alive, Alive dies, Dead stays Dead."""
        if self.state == LifeState.BOOSTED:
            return self._copy_with(state=LifeState.ALIVE)
        if self.state == LifeState.ALIVE:
            return self._copy_with(state=LifeState.DEAD, charges=0)
        return self

    def is_dead(self) -> bool:
        return self.state == LifeState.DEAD

    @property
    def is_boosted(self) -> bool:
        return self.state == LifeState.BOOSTED

    def _charge_gain(self) -> int:
        if self.state == LifeState.BOOSTED:
            return 2
        if self.state == LifeState.ALIVE:
            return 1
        return 0

    def _copy_with(self, **kwargs) -> Participant:
        return Participant(
            id=kwargs.get("id", self.id),
            name=kwargs.get("name", self.name),
            charges=kwargs.get("charges", self.charges),
            state=kwargs.get("state", self.state),
        )


@dataclass
class Game:
    """
    Complete game state between rounds.

    The roster is fixed once the game starts. All changes go through
    add_player/start and the round engine, each returning a new Game.
    """
    game_id: int
    players: dict[ParticipantId, Participant] = field(default_factory=dict)
    phase: GamePhase = GamePhase.SETUP
    winner: ParticipantId | None = None
    round_number: int = 0

    @classmethod
    def new(cls, game_id: int) -> Game:
        """Create an empty game in setup."""
        return cls(game_id=game_id)

    @property
    def is_over(self) -> bool:
        return self.phase == GamePhase.ENDED

    @property
    def num_players(self) -> int:
        return len(self.players)

    def get_player(self, player_id: ParticipantId) -> Participant | None:
        """Get participant by ID."""
        return self.players.get(player_id)

    def alive_players(self) -> list[Participant]:
        """Participants that are not Dead (Boosted counts as alive)."""
        return [p for p in self.players.values() if not p.is_dead()]

    def add_player(self, player: Participant) -> Game:
        """Return new game with the participant added to the roster."""
        if self.phase != GamePhase.SETUP:
            raise GameAlreadyStartedError(
                f"Cannot add participant {player.id}: game {self.game_id} is {self.phase.value}"
            )
        if player.id in self.players:
            raise DuplicateParticipantError(player.id)
        new_players = self.players.copy()
        new_players[player.id] = player
        return self._copy_with(players=new_players)

    def start(self) -> Game:
        """
        Move from setup to playing.

        Starting a game that is already playing changes nothing.
        """
        if self.phase == GamePhase.ENDED:
            raise GameEndedError(f"Game {self.game_id} has already ended")
        if self.phase == GamePhase.PLAYING:
            return self
        return self._copy_with(phase=GamePhase.PLAYING)

    def _copy_with(self, **kwargs) -> Game:
        """Create a copy with some fields replaced."""
        return Game(
            game_id=kwargs.get("game_id", self.game_id),
            players=dict(kwargs.get("players", self.players)),
            phase=kwargs.get("phase", self.phase),
            winner=kwargs.get("winner", self.winner),
            round_number=kwargs.get("round_number", self.round_number),
        )
