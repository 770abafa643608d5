"""
Movement and Combat - Adjacency-gated moves and melee resolution.

Moves: one step to an adjacent, on-board, empty hex, once per turn, in
the Movement phase, by the unit's owner.

Combat is simultaneous and symmetric: both sides deal their AP to the
other's HP, computed from pre-attack values. Units at hp <= 0 are
removed in the same transition. Range is always 1; there are no terrain
or defense modifiers.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

from .action import Rejection, RejectionKind
from .config import AttackPhasePolicy
from .grid import is_adjacent
from .state import GamePhase, GameState

if TYPE_CHECKING:
    from .config import RulesConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AttackOutcome:
    """What an attack did, for logging and UI feedback."""
    attacker_id: str
    defender_id: str
    damage_to_attacker: int
    damage_to_defender: int
    attacker_destroyed: bool
    defender_destroyed: bool


def validate_move(state: GameState, unit_id: str, q: int, r: int) -> Rejection | None:
    """
    Check whether unit_id may step to (q, r).

    Returns the first failed check, or None if the move is legal.
    """
    unit = state.unit_by_id(unit_id)
    if unit is None:
        return Rejection(RejectionKind.REFERENTIAL, f"Unit {unit_id} not found")

    if unit.owner is not state.current_player:
        return Rejection(
            RejectionKind.AUTHORIZATION,
            f"Unit {unit_id} belongs to {unit.owner.value}, not {state.current_player.value}",
        )

    if state.current_phase is not GamePhase.MOVEMENT:
        return Rejection(
            RejectionKind.PHASE,
            f"Units can only move in the Movement phase, not {state.current_phase.value}",
        )

    if unit.has_moved:
        return Rejection(RejectionKind.PHASE, f"Unit {unit_id} has already moved this turn")

    if not is_adjacent(unit.coords, (q, r)):
        return Rejection(
            RejectionKind.SPATIAL, f"({q}, {r}) is not adjacent to unit {unit_id} at {unit.coords}"
        )

    if state.hex_at(q, r) is None:
        return Rejection(RejectionKind.SPATIAL, f"({q}, {r}) is off the board")

    if state.unit_at(q, r) is not None:
        return Rejection(RejectionKind.SPATIAL, f"({q}, {r}) is occupied")

    return None


def apply_move(state: GameState, unit_id: str, q: int, r: int) -> GameState:
    """Relocate a unit that validate_move accepted, keeping it selected."""
    unit = state.unit_by_id(unit_id)
    moved = replace(unit, q=q, r=r, has_moved=True)
    logger.info("Unit %s moved %s -> (%d, %d)", unit_id, unit.coords, q, r)
    return state.with_unit(moved)._copy_with(selected_unit=unit_id)


def validate_attack(
    state: GameState,
    attacker_id: str,
    defender_id: str,
    policy: AttackPhasePolicy = AttackPhasePolicy.ANY_PHASE,
) -> Rejection | None:
    """
    Check whether attacker_id may attack defender_id.

    Returns the first failed check, or None if the attack is legal.
    """
    attacker = state.unit_by_id(attacker_id)
    defender = state.unit_by_id(defender_id)
    if attacker is None or defender is None:
        missing = attacker_id if attacker is None else defender_id
        return Rejection(RejectionKind.REFERENTIAL, f"Unit {missing} not found")

    if attacker.owner is not state.current_player:
        return Rejection(
            RejectionKind.AUTHORIZATION,
            f"Attacker {attacker_id} is not controlled by {state.current_player.value}",
        )

    if defender.owner is not state.current_player.opponent:
        return Rejection(
            RejectionKind.AUTHORIZATION, f"Defender {defender_id} is not an enemy unit"
        )

    if policy is AttackPhasePolicy.COMBAT_ONLY and state.current_phase is not GamePhase.COMBAT:
        return Rejection(
            RejectionKind.PHASE,
            f"Attacks are only allowed in the Combat phase, not {state.current_phase.value}",
        )

    if not is_adjacent(attacker.coords, defender.coords):
        return Rejection(
            RejectionKind.SPATIAL, f"Units {attacker_id} and {defender_id} are not adjacent"
        )

    return None


def resolve_attack(state: GameState, attacker_id: str, defender_id: str) -> tuple[GameState, AttackOutcome]:
    """
    Exchange damage between two units that validate_attack accepted.

    Both units take damage from the other's pre-attack AP; any unit left
    at hp <= 0 is removed. Selection is cleared.
    """
    attacker = state.unit_by_id(attacker_id)
    defender = state.unit_by_id(defender_id)

    attacker_hp = attacker.hp - defender.ap
    defender_hp = defender.hp - attacker.ap

    survivors = []
    for unit in state.units:
        if unit.id == attacker_id:
            unit = replace(unit, hp=attacker_hp)
        elif unit.id == defender_id:
            unit = replace(unit, hp=defender_hp)
        if unit.hp > 0:
            survivors.append(unit)

    outcome = AttackOutcome(
        attacker_id=attacker_id,
        defender_id=defender_id,
        damage_to_attacker=defender.ap,
        damage_to_defender=attacker.ap,
        attacker_destroyed=attacker_hp <= 0,
        defender_destroyed=defender_hp <= 0,
    )
    logger.info(
        "Combat: %s (hp %d -> %d) vs %s (hp %d -> %d)",
        attacker_id, attacker.hp, attacker_hp, defender_id, defender.hp, defender_hp,
    )

    new_state = state._copy_with(units=tuple(survivors), selected_unit=None)
    return new_state, outcome
