"""
Tests for movement and combat rules.

Tests:
- Move validation order and effects
- Attack validation, phase policy
- Simultaneous damage and removal of the dead
"""

from dataclasses import replace

import pytest

from ..engine_core.action import RejectionKind
from ..engine_core.combat import apply_move, resolve_attack, validate_attack, validate_move
from ..engine_core.config import AttackPhasePolicy
from ..engine_core.state import GamePhase, Player, Unit


class TestValidateMove:
    """Tests for move legality."""

    def test_legal_step(self, combat_state):
        assert validate_move(combat_state, "unit-A-1", 5, 1) is None

    def test_unknown_unit(self, combat_state):
        rejection = validate_move(combat_state, "unit-A-99", 5, 1)
        assert rejection.kind is RejectionKind.REFERENTIAL

    def test_enemy_unit(self, combat_state):
        rejection = validate_move(combat_state, "unit-B-2", 6, 3)
        assert rejection.kind is RejectionKind.AUTHORIZATION

    def test_wrong_phase(self, combat_state):
        state = combat_state._copy_with(current_phase=GamePhase.COMBAT)
        rejection = validate_move(state, "unit-A-1", 5, 1)
        assert rejection.kind is RejectionKind.PHASE

    def test_already_moved(self, combat_state):
        unit = replace(combat_state.unit_by_id("unit-A-1"), has_moved=True)
        state = combat_state.with_unit(unit)
        rejection = validate_move(state, "unit-A-1", 5, 1)
        assert rejection.kind is RejectionKind.PHASE
        assert "already moved" in rejection.reason

    @pytest.mark.parametrize("target", [(5, 2), (7, 2), (3, 2), (6, 3)])
    def test_not_adjacent(self, combat_state, target):
        rejection = validate_move(combat_state, "unit-A-1", *target)
        assert rejection.kind is RejectionKind.SPATIAL

    def test_off_board(self, combat_state):
        unit = replace(combat_state.unit_by_id("unit-A-1"), q=0, r=0)
        state = combat_state.with_unit(unit)
        rejection = validate_move(state, "unit-A-1", -1, 0)
        assert rejection.kind is RejectionKind.SPATIAL
        assert "off the board" in rejection.reason

    def test_occupied(self, combat_state):
        rejection = validate_move(combat_state, "unit-A-1", 6, 2)
        assert rejection.kind is RejectionKind.SPATIAL
        assert "occupied" in rejection.reason


class TestApplyMove:
    """Tests for move effects."""

    def test_move_relocates_and_marks(self, combat_state):
        new_state = apply_move(combat_state, "unit-A-1", 5, 3)

        unit = new_state.unit_by_id("unit-A-1")
        assert unit.coords == (5, 3)
        assert unit.has_moved
        assert new_state.selected_unit == "unit-A-1"
        assert combat_state.unit_by_id("unit-A-1").coords == (5, 2)


class TestValidateAttack:
    """Tests for attack legality."""

    def test_legal_attack(self, combat_state):
        assert validate_attack(combat_state, "unit-A-1", "unit-B-2") is None

    def test_missing_unit(self, combat_state):
        rejection = validate_attack(combat_state, "unit-A-1", "unit-B-9")
        assert rejection.kind is RejectionKind.REFERENTIAL

    def test_attacker_not_current_player(self, combat_state):
        rejection = validate_attack(combat_state, "unit-B-2", "unit-A-1")
        assert rejection.kind is RejectionKind.AUTHORIZATION

    def test_cannot_attack_own_unit(self, combat_state):
        friend = Unit(id="unit-A-3", owner=Player.A, q=5, r=3, ap=1, hp=1)
        state = combat_state._copy_with(units=combat_state.units + (friend,))
        rejection = validate_attack(state, "unit-A-1", "unit-A-3")
        assert rejection.kind is RejectionKind.AUTHORIZATION

    def test_not_adjacent(self, combat_state):
        far = replace(combat_state.unit_by_id("unit-B-2"), q=9, r=6)
        state = combat_state.with_unit(far)
        rejection = validate_attack(state, "unit-A-1", "unit-B-2")
        assert rejection.kind is RejectionKind.SPATIAL

    def test_any_phase_by_default(self, combat_state):
        """Attacks outside Combat are allowed unless the policy says otherwise."""
        state = combat_state._copy_with(current_phase=GamePhase.DEV1)
        assert validate_attack(state, "unit-A-1", "unit-B-2") is None

    def test_combat_only_policy(self, combat_state):
        policy = AttackPhasePolicy.COMBAT_ONLY
        rejection = validate_attack(combat_state, "unit-A-1", "unit-B-2", policy)
        assert rejection.kind is RejectionKind.PHASE

        in_combat = combat_state._copy_with(current_phase=GamePhase.COMBAT)
        assert validate_attack(in_combat, "unit-A-1", "unit-B-2", policy) is None


class TestResolveAttack:
    """Tests for damage exchange."""

    def test_defender_dies_attacker_survives(self, combat_state):
        """ap 3 / hp 5 against ap 4 / hp 2: attacker left at 1, defender removed."""
        new_state, outcome = resolve_attack(combat_state, "unit-A-1", "unit-B-2")

        attacker = new_state.unit_by_id("unit-A-1")
        assert attacker.hp == 1
        assert new_state.unit_by_id("unit-B-2") is None
        assert outcome.defender_destroyed
        assert not outcome.attacker_destroyed
        assert outcome.damage_to_attacker == 4
        assert outcome.damage_to_defender == 3

    def test_both_can_die(self, combat_state):
        weak = replace(combat_state.unit_by_id("unit-A-1"), hp=4)
        state = combat_state.with_unit(weak)

        new_state, outcome = resolve_attack(state, "unit-A-1", "unit-B-2")

        assert new_state.units == ()
        assert outcome.attacker_destroyed and outcome.defender_destroyed

    def test_both_survive(self, combat_state):
        tough = replace(combat_state.unit_by_id("unit-B-2"), hp=10)
        state = combat_state.with_unit(tough)

        new_state, _ = resolve_attack(state, "unit-A-1", "unit-B-2")

        assert new_state.unit_by_id("unit-A-1").hp == 1
        assert new_state.unit_by_id("unit-B-2").hp == 7

    def test_clears_selection(self, combat_state):
        state = combat_state._copy_with(selected_unit="unit-A-1")
        new_state, _ = resolve_attack(state, "unit-A-1", "unit-B-2")
        assert new_state.selected_unit is None

    def test_no_zero_hp_units_remain(self, combat_state):
        exact = replace(combat_state.unit_by_id("unit-B-2"), hp=3)
        state = combat_state.with_unit(exact)
        new_state, _ = resolve_attack(state, "unit-A-1", "unit-B-2")
        assert all(u.hp > 0 for u in new_state.units)
        assert new_state.unit_by_id("unit-B-2") is None
