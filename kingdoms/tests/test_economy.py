"""
Tests for the resource economy.
"""

import random

import pytest

from ..engine_core.economy import (
    MAX_GOLD,
    active_generators,
    add_gold,
    can_afford,
    clamp_gold,
    collect_resources,
    generator_count,
    spend_gold,
)
from ..engine_core.errors import InsufficientGold
from ..engine_core.state import GameState, Player, PlayerPair


@pytest.fixture
def economy_state(capital_board) -> GameState:
    """A with 3 generators, B with 2, both at turn 1 and 0 gold."""
    return GameState(
        board=capital_board,
        turn_number=PlayerPair.of(1),
        setup_complete=True,
    )


class TestGenerators:
    """Tests for generator counting and the turn ramp."""

    def test_generator_count(self, economy_state):
        assert generator_count(economy_state, Player.A) == 3
        assert generator_count(economy_state, Player.B) == 2

    @pytest.mark.parametrize("turn,expected", [(0, 0), (1, 1), (2, 2), (3, 3), (7, 3)])
    def test_ramp(self, economy_state, turn, expected):
        """Active generators never exceed the turn number."""
        state = economy_state._copy_with(turn_number=PlayerPair(a=turn, b=1))
        assert active_generators(state, Player.A) == expected

    def test_generators_without_capital(self, board):
        state = GameState(board=board, turn_number=PlayerPair.of(5))
        assert active_generators(state, Player.A) == 0


class TestCollectResources:
    """Tests for income collection."""

    def test_collect_adds_active_generators(self, economy_state):
        state = economy_state._copy_with(turn_number=PlayerPair(a=2, b=1))
        new_state = collect_resources(state, Player.A)

        assert new_state.gold_of(Player.A) == 2
        assert new_state.gold_of(Player.B) == 0
        assert new_state.resources_collected_this_turn

    def test_collect_is_capped(self, economy_state):
        state = economy_state.with_gold(Player.A, 19)._copy_with(turn_number=PlayerPair(a=3, b=1))
        new_state = collect_resources(state, Player.A)
        assert new_state.gold_of(Player.A) == MAX_GOLD

    def test_collect_with_custom_cap(self, economy_state):
        state = economy_state.with_gold(Player.A, 10)
        new_state = collect_resources(state, Player.A, max_gold=10)
        assert new_state.gold_of(Player.A) == 10


class TestGold:
    """Tests for gold arithmetic."""

    def test_clamp(self):
        assert clamp_gold(-3) == 0
        assert clamp_gold(7) == 7
        assert clamp_gold(25) == 20

    def test_add_gold_clamps(self, economy_state):
        assert add_gold(economy_state, Player.A, 50).gold_of(Player.A) == 20

    def test_spend(self, economy_state):
        state = economy_state.with_gold(Player.B, 8)
        assert can_afford(state, Player.B, 8)
        assert spend_gold(state, Player.B, 5).gold_of(Player.B) == 3

    def test_overspend_raises(self, economy_state):
        state = economy_state.with_gold(Player.A, 4)
        assert not can_afford(state, Player.A, 5)
        with pytest.raises(InsufficientGold) as exc:
            spend_gold(state, Player.A, 5)
        assert exc.value.cost == 5
        assert exc.value.gold == 4

    def test_gold_stays_in_bounds(self, economy_state):
        """Any sequence of collects and affordable spends keeps 0 <= gold <= 20."""
        rng = random.Random(1234)
        state = economy_state
        for _ in range(500):
            turn = rng.randint(0, 10)
            state = state._copy_with(turn_number=PlayerPair(a=turn, b=turn))
            player = rng.choice([Player.A, Player.B])
            if rng.random() < 0.5:
                state = collect_resources(state, player)
            else:
                cost = rng.randint(0, 8)
                if can_afford(state, player, cost):
                    state = spend_gold(state, player, cost)
            for p in Player:
                assert 0 <= state.gold_of(p) <= MAX_GOLD
