"""
Pydantic Schemas - The in-process contract between a UI layer and the engine.

A UI sends plain action dicts ({"type": "MOVE_UNIT", "payload": {...}})
and reads back serializable snapshots. Field aliases accept and emit the
camelCase names a JavaScript-style UI uses (unitId, targetHex, ...).
"""

from typing import Any, Literal, Optional

from pydantic import BaseModel, Field

from ..engine_core.action import ActionType

PlayerName = Literal["A", "B"]
ZoneName = Literal["A", "Neutral", "B"]

_ALIASED = {"populate_by_name": True, "from_attributes": True}


# =============================================================================
# Shared Models
# =============================================================================

class HexInfo(BaseModel):
    """A board cell."""
    id: Optional[str] = None
    q: int
    r: int
    zone: ZoneName
    capital_owner: Optional[PlayerName] = Field(None, alias="capitalOwner")
    generate_resource: bool = Field(False, alias="generateResource")

    model_config = _ALIASED


class UnitInfo(BaseModel):
    """A unit on the board."""
    id: str
    owner: PlayerName
    q: int
    r: int
    ap: int
    hp: int = Field(gt=0)
    has_moved: bool = Field(False, alias="hasMoved")

    model_config = _ALIASED


class UnitStatsInfo(BaseModel):
    ap: int
    hp: int


class CardInfo(BaseModel):
    """Card information for display."""
    id: str
    name: str
    cost: int
    type: Literal["unit", "resource", "spell", "building"]
    subtype: Optional[str] = None
    unit_stats: Optional[UnitStatsInfo] = Field(None, alias="unitStats")
    resource_amount: Optional[int] = Field(None, alias="resourceAmount")
    description: str = ""
    effect: str = ""

    model_config = _ALIASED


class ResourceInfo(BaseModel):
    gold: int = Field(ge=0)


class GameSnapshot(BaseModel):
    """Read-only view of a GameState for rendering."""
    current_player: PlayerName = Field(alias="currentPlayer")
    current_phase: str = Field(alias="currentPhase")
    turn_number: dict[PlayerName, int] = Field(alias="turnNumber")
    board: list[HexInfo] = Field(default_factory=list)
    resources: dict[PlayerName, ResourceInfo]
    game_started: bool = Field(alias="gameStarted")
    setup_complete: bool = Field(alias="setupComplete")
    resources_collected_this_turn: bool = Field(False, alias="resourcesCollectedThisTurn")
    units: list[UnitInfo] = Field(default_factory=list)
    selected_unit: Optional[str] = Field(None, alias="selectedUnit")
    hands: dict[PlayerName, list[CardInfo]]
    deck_sizes: dict[PlayerName, int] = Field(alias="deckSizes")
    selected_card: Optional[str] = Field(None, alias="selectedCard")

    model_config = _ALIASED


# =============================================================================
# Action Payload Models
# =============================================================================

class ResetGameRequest(BaseModel):
    starting_player: Optional[PlayerName] = Field(None, alias="startingPlayer")

    model_config = _ALIASED


class StartGameRequest(BaseModel):
    starting_player: PlayerName = Field(alias="startingPlayer")
    seed: Optional[int] = None

    model_config = _ALIASED


class PlaceCapitalRequest(BaseModel):
    owner: PlayerName
    q: int
    r: int


class HexRequest(BaseModel):
    q: int
    r: int


class DeployUnitRequest(BaseModel):
    q: int
    r: int
    ap: int
    hp: int


class MoveUnitRequest(BaseModel):
    unit_id: str = Field(alias="unitId")
    q: int
    r: int

    model_config = _ALIASED


class AttackUnitRequest(BaseModel):
    attacker_id: str = Field(alias="attackerId")
    defender_id: str = Field(alias="defenderId")

    model_config = _ALIASED


class PlayCardRequest(BaseModel):
    card_id: str = Field(alias="cardId")
    target_hex: Optional[HexRequest] = Field(None, alias="targetHex")

    model_config = _ALIASED


# =============================================================================
# Request / Response
# =============================================================================

class ActionRequest(BaseModel):
    """An action as a UI emits it: verb plus payload."""
    type: ActionType
    payload: Any = None


class ActionResponse(BaseModel):
    """Outcome of a dispatched action."""
    success: bool
    error: Optional[str] = None
    rejection: Optional[str] = Field(
        None, description="referential, authorization, phase, spatial, economic, payload"
    )
    state_changes: list[str] = Field(default_factory=list, alias="stateChanges")
    state: GameSnapshot

    model_config = _ALIASED
