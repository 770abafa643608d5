"""
API Service - Translation layer between UI payloads and the engine.

The service:
1. Parses plain action dicts into engine Actions
2. Turns GameState into serializable snapshots
3. Wraps ActionResults for the UI

This layer is framework-agnostic and runs in-process; there is no server.
"""

from __future__ import annotations
from typing import Any, TYPE_CHECKING

from ..engine_core.action import Action, ActionResult, ActionType
from ..engine_core.state import Card, GameState, Hex, Player, Unit, Zone
from .schemas import (
    ActionRequest,
    ActionResponse,
    AttackUnitRequest,
    CardInfo,
    DeployUnitRequest,
    GameSnapshot,
    HexInfo,
    HexRequest,
    MoveUnitRequest,
    PlaceCapitalRequest,
    PlayCardRequest,
    ResetGameRequest,
    ResourceInfo,
    StartGameRequest,
    UnitInfo,
    UnitStatsInfo,
)

if TYPE_CHECKING:
    from ..session.store import GameStore


# =============================================================================
# Engine -> UI
# =============================================================================

def hex_info(hex_: Hex) -> HexInfo:
    return HexInfo(
        id=hex_.id,
        q=hex_.q,
        r=hex_.r,
        zone=hex_.zone.value,
        capital_owner=hex_.capital_owner.value if hex_.capital_owner else None,
        generate_resource=hex_.generate_resource,
    )


def unit_info(unit: Unit) -> UnitInfo:
    return UnitInfo(
        id=unit.id,
        owner=unit.owner.value,
        q=unit.q,
        r=unit.r,
        ap=unit.ap,
        hp=unit.hp,
        has_moved=unit.has_moved,
    )


def card_info(card: Card) -> CardInfo:
    stats = card.unit_stats
    return CardInfo(
        id=card.id,
        name=card.name,
        cost=card.cost,
        type=card.card_type.value,
        subtype=card.subtype,
        unit_stats=UnitStatsInfo(ap=stats.ap, hp=stats.hp) if stats else None,
        resource_amount=card.resource_amount,
        description=card.description,
        effect=card.effect,
    )


def snapshot(state: GameState) -> GameSnapshot:
    """Serializable read-only view of state."""
    return GameSnapshot(
        current_player=state.current_player.value,
        current_phase=state.current_phase.value,
        turn_number={p.value: state.turn_number.get(p) for p in Player},
        board=[hex_info(h) for h in state.board],
        resources={p.value: ResourceInfo(gold=state.gold_of(p)) for p in Player},
        game_started=state.game_started,
        setup_complete=state.setup_complete,
        resources_collected_this_turn=state.resources_collected_this_turn,
        units=[unit_info(u) for u in state.units],
        selected_unit=state.selected_unit,
        hands={p.value: [card_info(c) for c in state.hand_of(p)] for p in Player},
        deck_sizes={p.value: len(state.deck_of(p)) for p in Player},
        selected_card=state.selected_card,
    )


def to_response(result: ActionResult) -> ActionResponse:
    return ActionResponse(
        success=result.success,
        error=result.error,
        rejection=result.rejection.value if result.rejection else None,
        state_changes=result.state_changes,
        state=snapshot(result.new_state),
    )


# =============================================================================
# UI -> Engine
# =============================================================================

def _hex_from_info(info: HexInfo) -> Hex:
    return Hex(
        q=info.q,
        r=info.r,
        zone=Zone(info.zone),
        capital_owner=Player(info.capital_owner) if info.capital_owner else None,
        generate_resource=info.generate_resource,
    )


def _selection(payload: Any) -> str | None:
    """SELECT_* payloads are a bare id, null, or {"id": ...}."""
    if isinstance(payload, dict):
        payload = payload.get("id")
    if payload is not None and not isinstance(payload, str):
        raise ValueError(f"Selection must be an id string or null, got {payload!r}")
    return payload


def parse_action(data: dict[str, Any] | ActionRequest) -> Action:
    """
    Build an engine Action from a UI action dict.

    Raises:
        pydantic.ValidationError: unknown type or malformed payload
        ValueError: malformed selection payload
    """
    request = data if isinstance(data, ActionRequest) else ActionRequest.model_validate(data)
    payload = request.payload if request.payload is not None else {}
    action_type = request.type

    if action_type is ActionType.RESET_GAME:
        req = ResetGameRequest.model_validate(payload)
        player = Player(req.starting_player) if req.starting_player else None
        return Action.reset_game(player)

    if action_type is ActionType.START_GAME:
        req = StartGameRequest.model_validate(payload)
        return Action.start_game(Player(req.starting_player), seed=req.seed)

    if action_type is ActionType.SET_BOARD:
        hexes = [HexInfo.model_validate(h) for h in payload]
        return Action.set_board(_hex_from_info(h) for h in hexes)

    if action_type is ActionType.PLACE_CAPITAL:
        req = PlaceCapitalRequest.model_validate(payload)
        return Action.place_capital(Player(req.owner), req.q, req.r)

    if action_type is ActionType.TOGGLE_RESOURCE_GENERATION:
        req = HexRequest.model_validate(payload)
        return Action.toggle_resource_generation(req.q, req.r)

    if action_type is ActionType.DEPLOY_UNIT:
        req = DeployUnitRequest.model_validate(payload)
        return Action.deploy_unit(req.q, req.r, req.ap, req.hp)

    if action_type is ActionType.SELECT_UNIT:
        return Action.select_unit(_selection(request.payload))

    if action_type is ActionType.MOVE_UNIT:
        req = MoveUnitRequest.model_validate(payload)
        return Action.move_unit(req.unit_id, req.q, req.r)

    if action_type is ActionType.ATTACK_UNIT:
        req = AttackUnitRequest.model_validate(payload)
        return Action.attack_unit(req.attacker_id, req.defender_id)

    if action_type is ActionType.SELECT_CARD:
        return Action.select_card(_selection(request.payload))

    if action_type is ActionType.PLAY_CARD:
        req = PlayCardRequest.model_validate(payload)
        target = (req.target_hex.q, req.target_hex.r) if req.target_hex else None
        return Action.play_card(req.card_id, target)

    # COMPLETE_SETUP, NEXT_PHASE, END_PHASE, DRAW_CARD carry no payload
    return Action(action_type)


def dispatch_request(store: GameStore, data: dict[str, Any]) -> ActionResponse:
    """Parse a UI action dict, dispatch it to store and wrap the result."""
    return to_response(store.dispatch(parse_action(data)))
