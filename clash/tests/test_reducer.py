"""
Tests for the round engine (state transitions).

Tests:
- Game lifecycle (setup, start, end)
- Round application and win detection
- Validation and error handling
- Atomicity of rejected rounds
"""

import pytest

from ..engine_core.action import Action
from ..engine_core.errors import (
    DuplicateParticipantError,
    GameAlreadyStartedError,
    GameEndedError,
    GameNotPlayingError,
    InsufficientChargeError,
    UnknownParticipantError,
    UnknownTargetError,
)
from ..engine_core.reducer import RoundEngine, apply_round, process_round
from ..engine_core.resolution import AllKill, Kill, NoKill
from ..engine_core.state import Game, GamePhase, LifeState, Participant
from .conftest import charge_up


class TestLifecycle:
    """Setup and start."""

    def test_new_game_is_in_setup(self):
        game = Game.new(7)
        assert game.phase == GamePhase.SETUP
        assert game.players == {}
        assert game.winner is None

    def test_add_player_returns_new_game(self, john):
        game = Game.new(7)
        with_john = game.add_player(john)
        assert game.players == {}
        assert with_john.get_player(1) == john

    def test_duplicate_player_rejected(self, setup_game):
        with pytest.raises(DuplicateParticipantError):
            setup_game.add_player(Participant(id=1, name="Other John"))

    def test_start_moves_to_playing(self, setup_game):
        assert setup_game.start().phase == GamePhase.PLAYING
        assert setup_game.phase == GamePhase.SETUP

    def test_start_is_noop_when_playing(self, two_player_game):
        assert two_player_game.start() is two_player_game

    def test_cannot_add_after_start(self, two_player_game, lisa):
        with pytest.raises(GameAlreadyStartedError):
            two_player_game.add_player(lisa)

    def test_start_after_end_fails(self, two_player_game):
        game = two_player_game._copy_with(phase=GamePhase.ENDED, winner=1)
        with pytest.raises(GameEndedError):
            game.start()


class TestRounds:
    """Round application end to end."""

    def test_two_players_one_killed_by_weak_attack(self, two_player_game):
        result = process_round(two_player_game, {1: Action.charge(), 2: Action.charge()})
        game = result.new_state
        assert game.get_player(1).charges == 1
        assert game.get_player(2).charges == 1
        assert game.phase == GamePhase.PLAYING

        result = process_round(game, {1: Action.attack_weak(2), 2: Action.charge()})
        final = result.new_state

        assert result.success
        assert result.killed == frozenset({2})
        assert final.get_player(2).is_dead()
        assert final.get_player(2).charges == 0
        assert final.get_player(1).charges == 0
        assert final.phase == GamePhase.ENDED
        assert final.winner == 1
        assert result.winner == 1
        assert final.round_number == 2

    def test_boosted_survives_one_hit(self, three_player_game):
        game = charge_up(three_player_game, 3)
        assert all(p.charges == 3 for p in game.players.values())

        result = process_round(game, {
            1: Action.boost_self(),
            2: Action.charge(),
            3: Action.charge(),
        })
        game = result.new_state
        john = game.get_player(1)
        assert john.state == LifeState.BOOSTED
        assert john.charges == 0
        assert result.killed == frozenset()

        result = process_round(game, {
            1: Action.charge(),
            2: Action.attack_weak(1),
            3: Action.charge(),
        })
        game = result.new_state
        john = game.get_player(1)
        assert result.killed == frozenset({1})
        assert john.state == LifeState.ALIVE
        # Boosted charge gain happens before the hit lands
        assert john.charges == 2
        assert game.phase == GamePhase.PLAYING
        assert "John loses the boost" in result.changes

    def test_counter_kills_attacker(self, two_player_game):
        game = charge_up(two_player_game, 4)

        result = process_round(game, {1: Action.attack_medium(2), 2: Action.counter(1)})
        game = result.new_state

        assert result.outcomes[1] == Kill(1)
        assert result.outcomes[2] == NoKill()
        assert result.killed == frozenset({1})
        assert game.get_player(1).is_dead()
        mark = game.get_player(2)
        assert mark.state == LifeState.ALIVE
        assert mark.charges == 0
        assert game.winner == 2

    def test_ultimate_clears_the_board(self, three_player_game):
        game = charge_up(three_player_game, 7)

        result = process_round(game, {
            1: Action.ultimate(),
            2: Action.block(),
            3: Action.counter(1),
        })
        assert result.outcomes[1] == AllKill(attacker=1)
        assert result.killed == frozenset({2, 3})
        assert result.new_state.winner == 1

    def test_mutual_kill_leaves_game_playing(self, two_player_game):
        game = charge_up(two_player_game, 7)

        result = process_round(game, {1: Action.ultimate(), 2: Action.ultimate()})
        game = result.new_state

        assert result.killed == frozenset({1, 2})
        assert game.alive_players() == []
        assert game.phase == GamePhase.PLAYING
        assert game.winner is None

    def test_two_survivors_keep_playing(self, three_player_game):
        game = charge_up(three_player_game, 1)
        result = process_round(game, {
            1: Action.attack_weak(3),
            2: Action.block(),
            3: Action.charge(),
        })
        assert result.killed == frozenset({3})
        assert result.new_state.phase == GamePhase.PLAYING
        assert result.winner is None

    def test_dead_participant_stays_in_roster(self, three_player_game):
        game = charge_up(three_player_game, 1)
        game = process_round(game, {
            1: Action.attack_weak(3),
            2: Action.charge(),
            3: Action.charge(),
        }).new_state

        assert game.num_players == 3
        lisa = game.get_player(3)
        assert lisa.is_dead()

        # Dead participants can still be listed; charging gains nothing
        game = process_round(game, {
            1: Action.charge(),
            2: Action.charge(),
            3: Action.charge(),
        }).new_state
        assert game.get_player(3).charges == 0
        assert game.get_player(3).is_dead()

    @pytest.mark.parametrize(
        "attack", [Action.attack_weak, Action.attack_medium, Action.attack_strong]
    )
    def test_self_targeted_attack_only_costs_charges(self, two_player_game, attack):
        game = charge_up(two_player_game, 5)

        result = process_round(game, {1: attack(1), 2: Action.charge()})
        john = result.new_state.get_player(1)

        assert result.killed == frozenset()
        assert john.state == LifeState.ALIVE
        assert john.charges == 5 - attack(1).cost
        assert result.new_state.phase == GamePhase.PLAYING

    def test_start_does_not_share_roster(self, setup_game):
        started = setup_game.start()
        assert started.players == setup_game.players
        assert started.players is not setup_game.players

    def test_input_game_is_not_mutated(self, two_player_game):
        before = two_player_game.players.copy()
        process_round(two_player_game, {1: Action.charge(), 2: Action.charge()})
        assert two_player_game.players == before
        assert two_player_game.round_number == 0


class TestRoundValidation:
    """Contract violations fail loudly."""

    def test_round_before_start_fails(self, setup_game):
        with pytest.raises(GameNotPlayingError):
            process_round(setup_game, {1: Action.charge(), 2: Action.charge()})

    def test_round_after_end_fails(self, two_player_game):
        game = charge_up(two_player_game, 1)
        game = process_round(game, {1: Action.attack_weak(2), 2: Action.charge()}).new_state
        assert game.is_over

        with pytest.raises(GameEndedError):
            process_round(game, {1: Action.charge(), 2: Action.charge()})

    def test_unknown_actor_fails(self, two_player_game):
        with pytest.raises(UnknownParticipantError):
            process_round(two_player_game, {1: Action.charge(), 9: Action.charge()})

    def test_unknown_target_fails(self, two_player_game):
        game = charge_up(two_player_game, 1)
        with pytest.raises(UnknownTargetError):
            process_round(game, {1: Action.attack_weak(9), 2: Action.charge()})

    def test_target_without_move_fails(self, three_player_game):
        game = charge_up(three_player_game, 1)
        with pytest.raises(UnknownTargetError):
            process_round(game, {1: Action.attack_weak(3), 2: Action.charge()})

    def test_overspending_fails(self, two_player_game):
        with pytest.raises(InsufficientChargeError):
            process_round(two_player_game, {1: Action.attack_weak(2), 2: Action.charge()})


class TestApplyRound:
    """The non-raising entry point."""

    def test_success_result(self, two_player_game):
        result = apply_round(two_player_game, {1: Action.charge(), 2: Action.charge()})
        assert result.success
        assert result.error is None
        assert "John charges 0 -> 1" in result.changes

    def test_failure_result_carries_error_code(self, two_player_game):
        result = apply_round(two_player_game, {1: Action.ultimate(), 2: Action.charge()})
        assert not result.success
        assert result.new_state is None
        assert result.error_code == "INSUFFICIENT_CHARGE"
        assert "costs 7" in result.error

    def test_failed_round_leaves_game_untouched(self, two_player_game):
        # Mark's charge is applied before John's overspend is detected
        result = RoundEngine().apply(two_player_game, {2: Action.charge(), 1: Action.attack_weak(2)})
        assert not result.success
        assert two_player_game.get_player(2).charges == 0

    def test_not_playing_error_code(self, setup_game):
        result = apply_round(setup_game, {1: Action.charge(), 2: Action.charge()})
        assert result.error_code == "GAME_NOT_PLAYING"
