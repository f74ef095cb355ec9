"""
Pytest fixtures for Clash tests.
"""

import pytest

from ..engine_core.action import Action
from ..engine_core.reducer import process_round
from ..engine_core.state import Game, Participant


def charge_up(game: Game, rounds: int) -> Game:
    """Play rounds where everyone still alive charges."""
    for _ in range(rounds):
        actions = {p.id: Action.charge() for p in game.players.values()}
        game = process_round(game, actions).new_state
    return game


@pytest.fixture
def john() -> Participant:
    return Participant(id=1, name="John")


@pytest.fixture
def mark() -> Participant:
    return Participant(id=2, name="Mark")


@pytest.fixture
def lisa() -> Participant:
    return Participant(id=3, name="Lisa")


@pytest.fixture
def setup_game(john, mark) -> Game:
    """A 2-player game still in setup."""
    return Game.new(1234).add_player(john).add_player(mark)


@pytest.fixture
def two_player_game(setup_game) -> Game:
    """A started 2-player game, nobody charged yet."""
    return setup_game.start()


@pytest.fixture
def three_player_game(john, mark, lisa) -> Game:
    """A started 3-player game, nobody charged yet."""
    return Game.new(99).add_player(john).add_player(mark).add_player(lisa).start()
