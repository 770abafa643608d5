"""
Tests for the phase cycle and turn hand-over.
"""

import random
from dataclasses import replace

import pytest

from ..engine_core.phases import (
    PHASE_ORDER,
    advance_phase,
    complete_setup,
    next_phase,
    roll_starting_player,
    start_turn,
)
from ..engine_core.state import GamePhase, Player, PlayerPair


class TestNextPhase:
    """Tests for the phase order."""

    @pytest.mark.parametrize("phase,expected", [
        (GamePhase.SETUP, GamePhase.RESOURCE),
        (GamePhase.RESOURCE, GamePhase.DRAW),
        (GamePhase.DRAW, GamePhase.DEV1),
        (GamePhase.DEV1, GamePhase.MOVEMENT),
        (GamePhase.MOVEMENT, GamePhase.COMBAT),
        (GamePhase.COMBAT, GamePhase.DEV2),
        (GamePhase.DEV2, GamePhase.END),
        (GamePhase.END, GamePhase.RESOURCE),
    ])
    def test_order_after_setup(self, phase, expected):
        assert next_phase(phase, setup_complete=True) is expected

    def test_end_wraps_to_setup_before_completion(self):
        assert next_phase(GamePhase.END, setup_complete=False) is GamePhase.SETUP

    def test_order_has_eight_phases(self):
        assert len(PHASE_ORDER) == 8
        assert PHASE_ORDER[0] is GamePhase.SETUP


class TestAdvancePhase:
    """Tests for phase side effects."""

    def test_leaving_resource_collects_once(self, playing_state):
        """Income from setup completion is not paid twice."""
        assert playing_state.resources_collected_this_turn
        new_state = advance_phase(playing_state)
        assert new_state.current_phase is GamePhase.DRAW
        assert new_state.gold_of(Player.A) == playing_state.gold_of(Player.A)

    def test_leaving_resource_collects_when_due(self, playing_state):
        state = playing_state._copy_with(resources_collected_this_turn=False)
        new_state = advance_phase(state)
        assert new_state.gold_of(Player.A) == playing_state.gold_of(Player.A) + 1
        assert new_state.resources_collected_this_turn

    def test_end_hands_turn_over(self, playing_state):
        state = playing_state._copy_with(current_phase=GamePhase.END)
        new_state = advance_phase(state)

        assert new_state.current_phase is GamePhase.RESOURCE
        assert new_state.current_player is Player.B
        assert new_state.turn_number == PlayerPair(a=1, b=1)
        assert not new_state.resources_collected_this_turn

    def test_other_phases_have_no_side_effects(self, combat_state):
        new_state = advance_phase(combat_state)
        assert new_state == combat_state._copy_with(current_phase=GamePhase.COMBAT)


class TestStartTurn:
    """Tests for turn start bookkeeping."""

    def test_resets_only_own_units(self, combat_state):
        moved = tuple(replace(u, has_moved=True) for u in combat_state.units)
        state = combat_state._copy_with(units=moved)

        new_state = start_turn(state, Player.B)

        assert new_state.unit_by_id("unit-B-2").has_moved is False
        assert new_state.unit_by_id("unit-A-1").has_moved is True
        assert new_state.turn_number == PlayerPair(a=2, b=2)
        assert new_state.current_player is Player.B


class TestCompleteSetup:
    """Tests for bootstrapping the first turn."""

    def test_bootstrap(self, setup_state):
        new_state = complete_setup(setup_state)

        assert new_state.setup_complete
        assert new_state.current_phase is GamePhase.RESOURCE
        assert new_state.turn_number == PlayerPair(a=1, b=0)
        assert new_state.gold_of(Player.A) == 1
        assert new_state.gold_of(Player.B) == 0


class TestRollStartingPlayer:
    """Tests for the opening roll."""

    def test_roll_decides_player(self):
        rng = random.Random(3)
        for _ in range(50):
            roll, player = roll_starting_player(rng)
            assert 1 <= roll <= 6
            assert player is (Player.A if roll % 2 == 0 else Player.B)
