"""
Action Generator - Generates all legal actions for a participant.

The action generator is used by:
1. Move collectors (CLI, UI) to show available actions
2. Validation (is this action in legal_actions?)

Design: Generates Action objects, not just action types.
Targeted moves are expanded once per possible target.
"""

from __future__ import annotations
from dataclasses import dataclass

from .action import Action, ActionType, ParticipantId
from .state import Game, GamePhase, Participant


@dataclass
class ActionGenerator:
    """
    Generates legal actions for one participant of a game.

    A move is legal when the participant can afford it. Targets are
    every other participant that is not Dead.
    """
    game: Game

    def generate(self, player_id: ParticipantId) -> list[Action]:
        """
        Generate all legal actions for a participant.

        Returns an empty list when the game is not being played or the
        participant is unknown or dead.
        """
        if self.game.phase != GamePhase.PLAYING:
            return []

        player = self.game.get_player(player_id)
        if player is None or player.is_dead():
            return []

        actions = []
        for action_type in ActionType:
            if action_type.requires_target:
                actions.extend(self._targeted_actions(player, action_type))
            else:
                action = Action(action_type)
                if player.can_afford(action):
                    actions.append(action)
        return actions

    def _targeted_actions(self, player: Participant, action_type: ActionType) -> list[Action]:
        if player.charges < action_type.cost:
            return []
        return [
            Action(action_type, target.id)
            for target in self.game.alive_players()
            if target.id != player.id
        ]


def legal_actions(game: Game, player_id: ParticipantId) -> list[Action]:
    """Convenience function to get legal actions for a participant."""
    return ActionGenerator(game).generate(player_id)
