"""
API Module - Boundary models for move collectors.

A collector (CLI, UI, network layer) uses these to:
1. Turn submitted moves into engine actions
2. Render game state and round outcomes

No transport lives here.
"""

from .schemas import (
    # Requests
    ActionModel,
    RoundRequest,
    # Responses
    ParticipantInfo,
    GameStateResponse,
    RoundResponse,
    # Enums
    ActionKind,
    LifeStatus,
    PhaseStatus,
    ErrorCode,
    # Conversion
    game_state_response,
    round_response,
)

__all__ = [
    "ActionModel",
    "RoundRequest",
    "ParticipantInfo",
    "GameStateResponse",
    "RoundResponse",
    "ActionKind",
    "LifeStatus",
    "PhaseStatus",
    "ErrorCode",
    "game_state_response",
    "round_response",
]
