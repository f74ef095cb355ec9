"""
Engine Core - Deterministic resolution of simultaneous combat rounds.

The engine is the runtime that:
1. Holds the roster and game phase (Game)
2. Tracks each participant's charges and life state
3. Resolves all moves of a round at once
4. Applies kills and detects the sole survivor
"""

from .action import Action, ActionType, PlayerMove, collect_moves, cost
from .state import Game, GamePhase, LifeState, Participant
from .resolution import AllKill, Kill, MoveResult, NoKill, kill_set, result_of
from .reducer import RoundEngine, RoundResult, apply_round, process_round
from .action_generator import ActionGenerator, legal_actions
from .errors import (
    ClashError,
    DuplicateMoveError,
    DuplicateParticipantError,
    GameAlreadyStartedError,
    GameEndedError,
    GameNotPlayingError,
    InsufficientChargeError,
    UnknownParticipantError,
    UnknownTargetError,
)

__all__ = [
    "Action",
    "ActionType",
    "PlayerMove",
    "collect_moves",
    "cost",
    "Game",
    "GamePhase",
    "LifeState",
    "Participant",
    "AllKill",
    "Kill",
    "MoveResult",
    "NoKill",
    "kill_set",
    "result_of",
    "RoundEngine",
    "RoundResult",
    "apply_round",
    "process_round",
    "ActionGenerator",
    "legal_actions",
    "ClashError",
    "DuplicateMoveError",
    "DuplicateParticipantError",
    "GameAlreadyStartedError",
    "GameEndedError",
    "GameNotPlayingError",
    "InsufficientChargeError",
    "UnknownParticipantError",
    "UnknownTargetError",
]
