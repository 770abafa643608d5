"""
Action System - Actions, payloads, and results.

The action vocabulary is closed: one ActionType per verb, one payload
dataclass per verb. The UI only ever emits these; it holds no rules
knowledge of its own.

All state changes flow through actions.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Union

from .state import Hex, Player


class ActionType(Enum):
    """Types of actions in the system."""
    # Game lifecycle
    RESET_GAME = "RESET_GAME"
    START_GAME = "START_GAME"

    # Setup
    SET_BOARD = "SET_BOARD"
    PLACE_CAPITAL = "PLACE_CAPITAL"
    TOGGLE_RESOURCE_GENERATION = "TOGGLE_RESOURCE_GENERATION"
    COMPLETE_SETUP = "COMPLETE_SETUP"

    # Units
    DEPLOY_UNIT = "DEPLOY_UNIT"
    SELECT_UNIT = "SELECT_UNIT"
    MOVE_UNIT = "MOVE_UNIT"
    ATTACK_UNIT = "ATTACK_UNIT"

    # Phases
    NEXT_PHASE = "NEXT_PHASE"
    END_PHASE = "END_PHASE"  # Alias of NEXT_PHASE

    # Cards
    DRAW_CARD = "DRAW_CARD"
    SELECT_CARD = "SELECT_CARD"
    PLAY_CARD = "PLAY_CARD"


class RejectionKind(Enum):
    """Why an action was turned down."""
    REFERENTIAL = "referential"  # Unit, card or hex id not found
    AUTHORIZATION = "authorization"  # Wrong owner or wrong player's turn
    PHASE = "phase"  # Wrong phase, or already done this turn
    SPATIAL = "spatial"  # Not adjacent, off-board, occupied, wrong zone
    ECONOMIC = "economic"  # Insufficient gold
    PAYLOAD = "payload"  # Malformed payload values


@dataclass(frozen=True)
class Rejection:
    """A failed rules check: the category and a readable reason."""
    kind: RejectionKind
    reason: str


# =============================================================================
# Payloads
# =============================================================================

@dataclass(frozen=True)
class NoPayload:
    """Payload for actions that carry no parameters."""


@dataclass(frozen=True)
class ResetGamePayload:
    starting_player: Player | None = None


@dataclass(frozen=True)
class StartGamePayload:
    starting_player: Player
    seed: int | None = None  # Overrides the state's random_seed for deck shuffles


@dataclass(frozen=True)
class SetBoardPayload:
    board: tuple[Hex, ...]


@dataclass(frozen=True)
class PlaceCapitalPayload:
    owner: Player
    q: int
    r: int


@dataclass(frozen=True)
class HexPayload:
    q: int
    r: int


@dataclass(frozen=True)
class DeployUnitPayload:
    q: int
    r: int
    ap: int
    hp: int


@dataclass(frozen=True)
class SelectPayload:
    """Selection of a unit or card id; None clears the selection."""
    target_id: str | None = None


@dataclass(frozen=True)
class MoveUnitPayload:
    unit_id: str
    q: int
    r: int


@dataclass(frozen=True)
class AttackUnitPayload:
    attacker_id: str
    defender_id: str


@dataclass(frozen=True)
class PlayCardPayload:
    card_id: str
    target_hex: tuple[int, int] | None = None


ActionPayload = Union[
    NoPayload,
    ResetGamePayload,
    StartGamePayload,
    SetBoardPayload,
    PlaceCapitalPayload,
    HexPayload,
    DeployUnitPayload,
    SelectPayload,
    MoveUnitPayload,
    AttackUnitPayload,
    PlayCardPayload,
]

# Payload shape expected for each action type
PAYLOAD_TYPES: dict[ActionType, type] = {
    ActionType.RESET_GAME: ResetGamePayload,
    ActionType.START_GAME: StartGamePayload,
    ActionType.SET_BOARD: SetBoardPayload,
    ActionType.PLACE_CAPITAL: PlaceCapitalPayload,
    ActionType.TOGGLE_RESOURCE_GENERATION: HexPayload,
    ActionType.COMPLETE_SETUP: NoPayload,
    ActionType.DEPLOY_UNIT: DeployUnitPayload,
    ActionType.SELECT_UNIT: SelectPayload,
    ActionType.MOVE_UNIT: MoveUnitPayload,
    ActionType.ATTACK_UNIT: AttackUnitPayload,
    ActionType.NEXT_PHASE: NoPayload,
    ActionType.END_PHASE: NoPayload,
    ActionType.DRAW_CARD: NoPayload,
    ActionType.SELECT_CARD: SelectPayload,
    ActionType.PLAY_CARD: PlayCardPayload,
}


@dataclass(frozen=True)
class Action:
    """
    A complete action to be applied to the game state.

    Build actions with the factories below; they pair every type with its
    payload shape.
    """
    action_type: ActionType
    payload: ActionPayload = NoPayload()

    def __post_init__(self):
        expected = PAYLOAD_TYPES[self.action_type]
        if not isinstance(self.payload, expected):
            raise TypeError(
                f"{self.action_type.value} expects {expected.__name__}, "
                f"got {type(self.payload).__name__}"
            )

    @classmethod
    def reset_game(cls, starting_player: Player | None = None) -> Action:
        return cls(ActionType.RESET_GAME, ResetGamePayload(starting_player=starting_player))

    @classmethod
    def start_game(cls, starting_player: Player, seed: int | None = None) -> Action:
        return cls(ActionType.START_GAME, StartGamePayload(starting_player=starting_player, seed=seed))

    @classmethod
    def set_board(cls, board) -> Action:
        return cls(ActionType.SET_BOARD, SetBoardPayload(board=tuple(board)))

    @classmethod
    def place_capital(cls, owner: Player, q: int, r: int) -> Action:
        return cls(ActionType.PLACE_CAPITAL, PlaceCapitalPayload(owner=owner, q=q, r=r))

    @classmethod
    def toggle_resource_generation(cls, q: int, r: int) -> Action:
        return cls(ActionType.TOGGLE_RESOURCE_GENERATION, HexPayload(q=q, r=r))

    @classmethod
    def complete_setup(cls) -> Action:
        return cls(ActionType.COMPLETE_SETUP)

    @classmethod
    def deploy_unit(cls, q: int, r: int, ap: int, hp: int) -> Action:
        return cls(ActionType.DEPLOY_UNIT, DeployUnitPayload(q=q, r=r, ap=ap, hp=hp))

    @classmethod
    def select_unit(cls, unit_id: str | None) -> Action:
        return cls(ActionType.SELECT_UNIT, SelectPayload(target_id=unit_id))

    @classmethod
    def move_unit(cls, unit_id: str, q: int, r: int) -> Action:
        return cls(ActionType.MOVE_UNIT, MoveUnitPayload(unit_id=unit_id, q=q, r=r))

    @classmethod
    def attack_unit(cls, attacker_id: str, defender_id: str) -> Action:
        return cls(
            ActionType.ATTACK_UNIT,
            AttackUnitPayload(attacker_id=attacker_id, defender_id=defender_id),
        )

    @classmethod
    def next_phase(cls) -> Action:
        return cls(ActionType.NEXT_PHASE)

    @classmethod
    def end_phase(cls) -> Action:
        return cls(ActionType.END_PHASE)

    @classmethod
    def draw_card(cls) -> Action:
        return cls(ActionType.DRAW_CARD)

    @classmethod
    def select_card(cls, card_id: str | None) -> Action:
        return cls(ActionType.SELECT_CARD, SelectPayload(target_id=card_id))

    @classmethod
    def play_card(cls, card_id: str, target_hex: tuple[int, int] | None = None) -> Action:
        return cls(ActionType.PLAY_CARD, PlayCardPayload(card_id=card_id, target_hex=target_hex))


@dataclass
class ActionResult:
    """
    Result of applying an action.

    new_state is always set: the new state on success, the identical
    prior state on rejection.
    """
    success: bool
    new_state: Any  # GameState
    error: str | None = None
    rejection: RejectionKind | None = None

    # Human-readable description of what changed
    state_changes: list[str] = field(default_factory=list)

    @classmethod
    def rejected(cls, state: Any, error: str, kind: RejectionKind) -> ActionResult:
        """Create a rejection carrying the unchanged state."""
        return cls(success=False, new_state=state, error=error, rejection=kind)

    @classmethod
    def from_rejection(cls, state: Any, rejection: Rejection) -> ActionResult:
        return cls.rejected(state, rejection.reason, rejection.kind)

    @classmethod
    def success_with_state(cls, state: Any, changes: list[str] | None = None) -> ActionResult:
        """Create a success result with new state."""
        return cls(success=True, new_state=state, state_changes=changes or [])
