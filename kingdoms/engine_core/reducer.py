"""
Reducer - Applies actions to game state.

The reducer is the single point of state transition.
All state changes must go through Reducer.apply().

Design principles:
- Pure function: (state, action) -> ActionResult
- Validates before applying; nothing is committed until every check passes
- Rejections are results, not exceptions: the result carries the
  identical prior state plus a RejectionKind and reason
- Follow-up effects (income, turn hand-over) are direct function calls,
  never a second dispatch
"""

from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import Callable

from .action import (
    Action,
    ActionResult,
    ActionType,
    Rejection,
    RejectionKind,
)
from .combat import apply_move, resolve_attack, validate_attack, validate_move
from .config import DEFAULT_CONFIG, RulesConfig
from .deck import build_decks, draw_card, find_card_in_hand, remove_card_from_hand
from .economy import add_gold, can_afford, spend_gold
from .errors import CapitalPlacementError, UnknownActionError
from .grid import has_capital, place_capital, toggle_resource_generation
from .phases import advance_phase, complete_setup
from .state import (
    DEVELOPMENT_PHASES,
    CardType,
    GamePhase,
    GameState,
    Player,
    PlayerPair,
    PlayerResources,
    Unit,
    initial_state,
)

logger = logging.getLogger(__name__)

Handler = Callable[[GameState, Action], ActionResult]


@dataclass
class Reducer:
    """
    Reducer applies actions to game state.

    Stateless - all state is in GameState.
    Config provides constants and rule policies.
    """
    config: RulesConfig = field(default_factory=lambda: DEFAULT_CONFIG)

    def __post_init__(self):
        self._handlers: dict[ActionType, Handler] = {
            ActionType.RESET_GAME: self._handle_reset_game,
            ActionType.START_GAME: self._handle_start_game,
            ActionType.SET_BOARD: self._handle_set_board,
            ActionType.PLACE_CAPITAL: self._handle_place_capital,
            ActionType.TOGGLE_RESOURCE_GENERATION: self._handle_toggle_resource_generation,
            ActionType.COMPLETE_SETUP: self._handle_complete_setup,
            ActionType.DEPLOY_UNIT: self._handle_deploy_unit,
            ActionType.SELECT_UNIT: self._handle_select_unit,
            ActionType.MOVE_UNIT: self._handle_move_unit,
            ActionType.ATTACK_UNIT: self._handle_attack_unit,
            ActionType.NEXT_PHASE: self._handle_next_phase,
            ActionType.END_PHASE: self._handle_next_phase,
            ActionType.DRAW_CARD: self._handle_draw_card,
            ActionType.SELECT_CARD: self._handle_select_card,
            ActionType.PLAY_CARD: self._handle_play_card,
        }
        missing = [t.value for t in ActionType if t not in self._handlers]
        if missing:
            raise UnknownActionError(f"No handler for action types: {', '.join(missing)}")

    def apply(self, state: GameState, action: Action) -> ActionResult:
        """
        Apply an action to the game state.

        Returns ActionResult with the new state, or the unchanged state and
        the reason it was rejected.
        """
        handler = self._handlers[action.action_type]
        result = handler(state, action)
        if not result.success:
            logger.warning(
                "%s rejected (%s): %s",
                action.action_type.value, result.rejection.value, result.error,
            )
        else:
            logger.debug("%s applied", action.action_type.value)
        return result

    # ------------------------------------------------------------------
    # Game lifecycle
    # ------------------------------------------------------------------

    def _handle_reset_game(self, state: GameState, action: Action) -> ActionResult:
        """Return to a fresh Setup state, keeping the shuffle seed."""
        starting = action.payload.starting_player or Player.A
        new_state = initial_state(starting_player=starting, random_seed=state.random_seed)
        logger.info("Game reset. Player %s will go first.", starting.value)
        return ActionResult.success_with_state(
            new_state,
            changes=[f"Game reset, player {starting.value} goes first"],
        )

    def _handle_start_game(self, state: GameState, action: Action) -> ActionResult:
        """Mark the game started, build both decks and zero resources."""
        payload = action.payload
        seed = state.random_seed if payload.seed is None else payload.seed
        deck_a, deck_b = build_decks(seed)

        new_state = state._copy_with(
            game_started=True,
            current_player=payload.starting_player,
            decks=PlayerPair(a=deck_a, b=deck_b),
            hands=PlayerPair.of(()),
            selected_card=None,
            resources=PlayerPair.of(PlayerResources()),
            random_seed=seed,
        )
        return ActionResult.success_with_state(
            new_state,
            changes=[f"Game started, player {payload.starting_player.value} goes first"],
        )

    # ------------------------------------------------------------------
    # Setup
    # ------------------------------------------------------------------

    def _handle_set_board(self, state: GameState, action: Action) -> ActionResult:
        board = tuple(action.payload.board)
        return ActionResult.success_with_state(
            state._copy_with(board=board),
            changes=[f"Board set ({len(board)} hexes)"],
        )

    def _setup_only(self, state: GameState) -> Rejection | None:
        if state.setup_complete or state.current_phase is not GamePhase.SETUP:
            return Rejection(RejectionKind.PHASE, "Only allowed during Setup")
        return None

    def _handle_place_capital(self, state: GameState, action: Action) -> ActionResult:
        payload = action.payload
        rejection = self._setup_only(state)
        if rejection:
            return ActionResult.from_rejection(state, rejection)

        if state.hex_at(payload.q, payload.r) is None:
            return ActionResult.rejected(
                state, f"No hex at ({payload.q}, {payload.r})", RejectionKind.SPATIAL
            )

        try:
            board = place_capital(
                state.board,
                payload.owner,
                payload.q,
                payload.r,
                policy=self.config.capital_placement_policy,
            )
        except CapitalPlacementError as e:
            return ActionResult.rejected(state, str(e), RejectionKind.SPATIAL)

        return ActionResult.success_with_state(
            state._copy_with(board=board),
            changes=[f"Capital for {payload.owner.value} placed at ({payload.q}, {payload.r})"],
        )

    def _handle_toggle_resource_generation(self, state: GameState, action: Action) -> ActionResult:
        payload = action.payload
        rejection = self._setup_only(state)
        if rejection:
            return ActionResult.from_rejection(state, rejection)

        hex_ = state.hex_at(payload.q, payload.r)
        if hex_ is None:
            return ActionResult.rejected(
                state, f"No hex at ({payload.q}, {payload.r})", RejectionKind.SPATIAL
            )
        if hex_.capital_owner is None:
            return ActionResult.rejected(
                state, f"Hex ({payload.q}, {payload.r}) is not part of a capital", RejectionKind.SPATIAL
            )

        board = toggle_resource_generation(state.board, payload.q, payload.r)
        return ActionResult.success_with_state(
            state._copy_with(board=board),
            changes=[f"Toggled resource generation at ({payload.q}, {payload.r})"],
        )

    def _handle_complete_setup(self, state: GameState, action: Action) -> ActionResult:
        rejection = self._setup_only(state)
        if rejection:
            return ActionResult.from_rejection(state, rejection)

        if self.config.require_capitals_for_setup:
            missing = [p.value for p in Player if not has_capital(state.board, p)]
            if missing:
                return ActionResult.rejected(
                    state,
                    f"Capitals not placed for: {', '.join(missing)}",
                    RejectionKind.SPATIAL,
                )

        new_state = complete_setup(state, self.config.max_gold)
        return ActionResult.success_with_state(
            new_state,
            changes=[f"Setup complete, player {state.current_player.value} begins turn 1"],
        )

    # ------------------------------------------------------------------
    # Units
    # ------------------------------------------------------------------

    def _development_only(self, state: GameState) -> Rejection | None:
        if self.config.development_phases_only and state.current_phase not in DEVELOPMENT_PHASES:
            return Rejection(
                RejectionKind.PHASE,
                f"Only allowed in a development phase, not {state.current_phase.value}",
            )
        return None

    def _placement_rejection(self, state: GameState, q: int, r: int) -> Rejection | None:
        """Check that the current player may put a new unit on (q, r)."""
        hex_ = state.hex_at(q, r)
        if hex_ is None:
            return Rejection(RejectionKind.SPATIAL, f"No hex at ({q}, {r})")
        if hex_.owner is not state.current_player:
            return Rejection(
                RejectionKind.SPATIAL,
                f"({q}, {r}) is not in player {state.current_player.value}'s territory",
            )
        if state.unit_at(q, r) is not None:
            return Rejection(RejectionKind.SPATIAL, f"({q}, {r}) is occupied")
        return None

    def _spawn_unit(self, state: GameState, q: int, r: int, ap: int, hp: int) -> tuple[GameState, Unit]:
        owner = state.current_player
        unit = Unit(
            id=f"unit-{owner.value}-{state.next_unit_number}",
            owner=owner,
            q=q,
            r=r,
            ap=ap,
            hp=hp,
        )
        new_state = state._copy_with(
            units=state.units + (unit,),
            next_unit_number=state.next_unit_number + 1,
        )
        logger.info("Player %s deployed %s at (%d, %d)", owner.value, unit.id, q, r)
        return new_state, unit

    def _handle_deploy_unit(self, state: GameState, action: Action) -> ActionResult:
        payload = action.payload
        player = state.current_player

        rejection = self._development_only(state)
        if rejection:
            return ActionResult.from_rejection(state, rejection)

        if payload.ap < 0 or payload.hp <= 0:
            return ActionResult.rejected(
                state, f"Invalid unit stats ap={payload.ap} hp={payload.hp}", RejectionKind.PAYLOAD
            )

        rejection = self._placement_rejection(state, payload.q, payload.r)
        if rejection:
            return ActionResult.from_rejection(state, rejection)

        cost = self.config.deploy_cost
        if not can_afford(state, player, cost):
            return ActionResult.rejected(
                state,
                f"Player {player.value} has {state.gold_of(player)} gold, deploying costs {cost}",
                RejectionKind.ECONOMIC,
            )

        new_state = spend_gold(state, player, cost)
        new_state, unit = self._spawn_unit(new_state, payload.q, payload.r, payload.ap, payload.hp)
        return ActionResult.success_with_state(
            new_state,
            changes=[f"{unit.id} deployed at ({unit.q}, {unit.r}) for {cost} gold"],
        )

    def _handle_select_unit(self, state: GameState, action: Action) -> ActionResult:
        return ActionResult.success_with_state(
            state._copy_with(selected_unit=action.payload.target_id)
        )

    def _handle_move_unit(self, state: GameState, action: Action) -> ActionResult:
        payload = action.payload
        rejection = validate_move(state, payload.unit_id, payload.q, payload.r)
        if rejection:
            return ActionResult.from_rejection(state, rejection)

        new_state = apply_move(state, payload.unit_id, payload.q, payload.r)
        return ActionResult.success_with_state(
            new_state,
            changes=[f"{payload.unit_id} moved to ({payload.q}, {payload.r})"],
        )

    def _handle_attack_unit(self, state: GameState, action: Action) -> ActionResult:
        payload = action.payload
        rejection = validate_attack(
            state,
            payload.attacker_id,
            payload.defender_id,
            policy=self.config.attack_phase_policy,
        )
        if rejection:
            return ActionResult.from_rejection(state, rejection)

        new_state, outcome = resolve_attack(state, payload.attacker_id, payload.defender_id)
        changes = [
            f"{outcome.attacker_id} dealt {outcome.damage_to_defender}, "
            f"took {outcome.damage_to_attacker}"
        ]
        if outcome.defender_destroyed:
            changes.append(f"{outcome.defender_id} destroyed")
        if outcome.attacker_destroyed:
            changes.append(f"{outcome.attacker_id} destroyed")
        return ActionResult.success_with_state(new_state, changes=changes)

    # ------------------------------------------------------------------
    # Phases
    # ------------------------------------------------------------------

    def _handle_next_phase(self, state: GameState, action: Action) -> ActionResult:
        """NEXT_PHASE and END_PHASE are the same operation."""
        new_state = advance_phase(state, self.config.max_gold)
        return ActionResult.success_with_state(
            new_state,
            changes=[f"Phase {state.current_phase.value} -> {new_state.current_phase.value}"],
        )

    # ------------------------------------------------------------------
    # Cards
    # ------------------------------------------------------------------

    def _handle_draw_card(self, state: GameState, action: Action) -> ActionResult:
        player = state.current_player
        new_state = draw_card(state, player)
        if new_state is None:
            return ActionResult.rejected(
                state, f"Player {player.value}'s deck is empty", RejectionKind.REFERENTIAL
            )
        return ActionResult.success_with_state(
            new_state,
            changes=[f"Player {player.value} drew a card"],
        )

    def _handle_select_card(self, state: GameState, action: Action) -> ActionResult:
        return ActionResult.success_with_state(
            state._copy_with(selected_card=action.payload.target_id)
        )

    def _handle_play_card(self, state: GameState, action: Action) -> ActionResult:
        """
        Play a card from the current player's hand.

        Every check, including unit placement, runs before the card is
        removed or its cost paid.
        """
        payload = action.payload
        player = state.current_player

        rejection = self._development_only(state)
        if rejection:
            return ActionResult.from_rejection(state, rejection)

        card = find_card_in_hand(state, player, payload.card_id)
        if card is None:
            return ActionResult.rejected(
                state, f"Card {payload.card_id} not in hand", RejectionKind.REFERENTIAL
            )

        if not can_afford(state, player, card.cost):
            return ActionResult.rejected(
                state,
                f"Player {player.value} has {state.gold_of(player)} gold, {card.name} costs {card.cost}",
                RejectionKind.ECONOMIC,
            )

        if card.card_type is CardType.UNIT:
            if payload.target_hex is None:
                return ActionResult.rejected(
                    state, f"{card.name} needs a target hex", RejectionKind.PAYLOAD
                )
            rejection = self._placement_rejection(state, *payload.target_hex)
            if rejection:
                return ActionResult.from_rejection(state, rejection)

        new_state = remove_card_from_hand(state, player, card.id)
        new_state = spend_gold(new_state, player, card.cost)
        new_state = new_state._copy_with(selected_card=None)
        changes = [f"Player {player.value} played {card.name} for {card.cost} gold"]

        if card.card_type is CardType.UNIT:
            stats = card.unit_stats
            ap = stats.ap if stats else self.config.default_unit_ap
            hp = stats.hp if stats else self.config.default_unit_hp
            q, r = payload.target_hex
            new_state, unit = self._spawn_unit(new_state, q, r, ap, hp)
            changes.append(f"{unit.id} deployed at ({q}, {r})")

        elif card.card_type is CardType.RESOURCE:
            amount = card.resource_amount or 0
            new_state = add_gold(new_state, player, amount, self.config.max_gold)
            changes.append(f"Player {player.value} gained {amount} gold")

        else:
            # TODO: building and spell effects (Watchtower, Barracks, Healing Prayer, Fireball)
            logger.info("%s card %s played; effect not implemented", card.card_type.value, card.name)

        return ActionResult.success_with_state(new_state, changes=changes)


def apply_action(state: GameState, action: Action, config: RulesConfig | None = None) -> ActionResult:
    """
    Convenience function to apply an action.

    Creates a Reducer and applies the action.
    """
    reducer = Reducer(config=config or DEFAULT_CONFIG)
    return reducer.apply(state, action)


def reduce(state: GameState, action: Action, config: RulesConfig | None = None) -> GameState:
    """The bare transition function: the next state, or state itself if rejected."""
    return apply_action(state, action, config).new_state
