"""
Action Generator - Legal targets and actions from a game state.

The action generator is used by:
1. UI to highlight move targets, attack targets and deploy hexes
2. Validation (is this action in legal_actions?)

Design: every query reuses the reducer's own checks, so anything
generated here is accepted by the reducer.
"""

from __future__ import annotations
from dataclasses import dataclass, field

from .action import Action
from .combat import validate_attack, validate_move
from .config import DEFAULT_CONFIG, RulesConfig
from .economy import can_afford
from .grid import get_adjacent_hexes
from .state import DEVELOPMENT_PHASES, Card, CardType, GamePhase, GameState, Hex


@dataclass
class ActionGenerator:
    """
    Generates legal actions for the current game state.
    """
    config: RulesConfig = field(default_factory=lambda: DEFAULT_CONFIG)

    def move_targets(self, state: GameState, unit_id: str) -> list[tuple[int, int]]:
        """Cells unit_id may move to right now."""
        unit = state.unit_by_id(unit_id)
        if unit is None:
            return []
        return [
            (q, r) for q, r in get_adjacent_hexes(unit.q, unit.r)
            if validate_move(state, unit_id, q, r) is None
        ]

    def attack_targets(self, state: GameState, unit_id: str) -> list[str]:
        """Ids of enemy units unit_id may attack right now."""
        unit = state.unit_by_id(unit_id)
        if unit is None:
            return []
        return [
            other.id for other in state.units
            if validate_attack(state, unit_id, other.id, self.config.attack_phase_policy) is None
        ]

    def deployable_hexes(self, state: GameState) -> list[Hex]:
        """Empty hexes in the current player's territory."""
        occupied = {u.coords for u in state.units}
        return [
            h for h in state.board
            if h.owner is state.current_player and h.coords not in occupied
        ]

    def playable_cards(self, state: GameState) -> list[Card]:
        """Hand cards the current player can pay for (and place, for units)."""
        if not self._development_allowed(state):
            return []
        player = state.current_player
        has_room = bool(self.deployable_hexes(state))
        return [
            card for card in state.hand_of(player)
            if can_afford(state, player, card.cost)
            and (card.card_type is not CardType.UNIT or has_room)
        ]

    def generate(self, state: GameState) -> list[Action]:
        """
        Generate the fully specified game actions open to the current player.

        Selection, setup and reset actions are not enumerated.
        """
        if not state.setup_complete:
            return []

        player = state.current_player
        actions = [Action.next_phase()]

        if state.deck_of(player):
            actions.append(Action.draw_card())

        if self._development_allowed(state):
            deploy_hexes = self.deployable_hexes(state)
            if can_afford(state, player, self.config.deploy_cost):
                actions.extend(
                    Action.deploy_unit(h.q, h.r, self.config.default_unit_ap, self.config.default_unit_hp)
                    for h in deploy_hexes
                )
            for card in self.playable_cards(state):
                if card.card_type is CardType.UNIT:
                    actions.extend(Action.play_card(card.id, h.coords) for h in deploy_hexes)
                else:
                    actions.append(Action.play_card(card.id))

        if state.current_phase is GamePhase.MOVEMENT:
            for unit in state.units_of(player):
                actions.extend(
                    Action.move_unit(unit.id, q, r) for q, r in self.move_targets(state, unit.id)
                )

        for unit in state.units_of(player):
            actions.extend(
                Action.attack_unit(unit.id, target) for target in self.attack_targets(state, unit.id)
            )

        return actions

    def _development_allowed(self, state: GameState) -> bool:
        return not self.config.development_phases_only or state.current_phase in DEVELOPMENT_PHASES


def legal_actions(state: GameState, config: RulesConfig | None = None) -> list[Action]:
    """
    Convenience function to get legal actions.

    Creates an ActionGenerator and generates actions.
    """
    generator = ActionGenerator(config=config or DEFAULT_CONFIG)
    return generator.generate(state)


def is_legal(state: GameState, action: Action, config: RulesConfig | None = None) -> bool:
    """Check if a specific action is among the generated legal actions."""
    return action in legal_actions(state, config)


def legal_move_targets(state: GameState, unit_id: str) -> list[tuple[int, int]]:
    return ActionGenerator().move_targets(state, unit_id)


def legal_attack_targets(state: GameState, unit_id: str, config: RulesConfig | None = None) -> list[str]:
    return ActionGenerator(config=config or DEFAULT_CONFIG).attack_targets(state, unit_id)


def deployable_hexes(state: GameState) -> list[Hex]:
    return ActionGenerator().deployable_hexes(state)


def playable_cards(state: GameState, config: RulesConfig | None = None) -> list[Card]:
    return ActionGenerator(config=config or DEFAULT_CONFIG).playable_cards(state)
