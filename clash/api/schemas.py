"""
Pydantic Schemas - Boundary models between the engine and move collectors.

Whatever gathers moves (CLI, UI, a network layer) hands the engine a
RoundRequest and renders GameStateResponse / RoundResponse. No transport
is defined here; these are plain models plus conversion helpers.

Error Codes:
- GAME_NOT_PLAYING: Round submitted before the game started
- GAME_ENDED: Round submitted after the game ended
- UNKNOWN_PARTICIPANT: Move submitted for an id outside the roster
- UNKNOWN_TARGET: Move targets an id with no move this round
- INSUFFICIENT_CHARGE: Move costs more than the participant holds
- VALIDATION_ERROR: Malformed request
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, model_validator

from ..engine_core.action import Action, ActionType
from ..engine_core.reducer import RoundResult
from ..engine_core.resolution import AllKill
from ..engine_core.state import Game


# =============================================================================
# Enums
# =============================================================================

class ActionKind(str, Enum):
    """Move variants, as sent over the boundary."""
    CHARGE = "charge"
    BLOCK = "block"
    ATTACK_WEAK = "attack_weak"
    ATTACK_MEDIUM = "attack_medium"
    BOOST_SELF = "boost_self"
    COUNTER = "counter"
    ATTACK_STRONG = "attack_strong"
    ATTACK_ULTIMATE = "attack_ultimate"


class LifeStatus(str, Enum):
    ALIVE = "alive"
    BOOSTED = "boosted"
    DEAD = "dead"


class PhaseStatus(str, Enum):
    SETUP = "setup"
    PLAYING = "playing"
    ENDED = "ended"


class ErrorCode(str, Enum):
    """Structured error codes."""
    GAME_NOT_PLAYING = "GAME_NOT_PLAYING"
    GAME_ENDED = "GAME_ENDED"
    GAME_ALREADY_STARTED = "GAME_ALREADY_STARTED"
    DUPLICATE_PARTICIPANT = "DUPLICATE_PARTICIPANT"
    UNKNOWN_PARTICIPANT = "UNKNOWN_PARTICIPANT"
    UNKNOWN_TARGET = "UNKNOWN_TARGET"
    INSUFFICIENT_CHARGE = "INSUFFICIENT_CHARGE"
    DUPLICATE_MOVE = "DUPLICATE_MOVE"
    VALIDATION_ERROR = "VALIDATION_ERROR"


# =============================================================================
# Request Models
# =============================================================================

class ActionModel(BaseModel):
    """One move. Targeted variants need a target, the others must not have one."""
    type: ActionKind
    target: Optional[int] = Field(None, description="Participant the move is aimed at")

    @model_validator(mode="after")
    def _check_target(self) -> "ActionModel":
        if ActionType(self.type.value).requires_target:
            if self.target is None:
                raise ValueError(f"{self.type.value} requires a target")
        elif self.target is not None:
            raise ValueError(f"{self.type.value} does not take a target")
        return self

    def to_action(self) -> Action:
        return Action(ActionType(self.type.value), self.target)

    @classmethod
    def from_action(cls, action: Action) -> "ActionModel":
        return cls(type=ActionKind(action.action_type.value), target=action.target)


class RoundRequest(BaseModel):
    """All moves of one round, keyed by participant id."""
    game_id: int
    moves: dict[int, ActionModel] = Field(
        default_factory=dict,
        description="participant id -> chosen move",
    )

    def to_actions(self) -> dict[int, Action]:
        return {player_id: move.to_action() for player_id, move in self.moves.items()}


# =============================================================================
# Response Models
# =============================================================================

class ParticipantInfo(BaseModel):
    """Participant information for display."""
    participant_id: int
    name: str
    charges: int = Field(0, ge=0)
    life_state: LifeStatus


class GameStateResponse(BaseModel):
    """Game state after the latest round."""
    game_id: int
    phase: PhaseStatus
    round_number: int = 0
    winner: Optional[int] = None
    players: list[ParticipantInfo] = Field(default_factory=list)


class RoundResponse(BaseModel):
    """Outcome of one round, or why it was rejected."""
    success: bool
    killed: list[int] = Field(default_factory=list)
    area_attackers: list[int] = Field(
        default_factory=list,
        description="Participants whose area attack went off this round",
    )
    winner: Optional[int] = None
    changes: list[str] = Field(default_factory=list)
    state: Optional[GameStateResponse] = None
    error: Optional[str] = None
    error_code: Optional[ErrorCode] = None


# =============================================================================
# Conversion
# =============================================================================

def game_state_response(game: Game) -> GameStateResponse:
    """Render a Game for the collaborator."""
    return GameStateResponse(
        game_id=game.game_id,
        phase=PhaseStatus(game.phase.value),
        round_number=game.round_number,
        winner=game.winner,
        players=[
            ParticipantInfo(
                participant_id=p.id,
                name=p.name,
                charges=p.charges,
                life_state=LifeStatus(p.state.value),
            )
            for p in sorted(game.players.values(), key=lambda p: p.id)
        ],
    )


def round_response(result: RoundResult) -> RoundResponse:
    """Render a RoundResult for the collaborator."""
    if not result.success:
        return RoundResponse(
            success=False,
            error=result.error,
            error_code=ErrorCode(result.error_code) if result.error_code else None,
        )
    return RoundResponse(
        success=True,
        killed=sorted(result.killed),
        area_attackers=sorted(
            outcome.attacker
            for outcome in result.outcomes.values()
            if isinstance(outcome, AllKill)
        ),
        winner=result.winner,
        changes=list(result.changes),
        state=game_state_response(result.new_state),
    )
