"""
Engine Core - Deterministic game state management.

The engine is the runtime that:
1. Builds the hex board and capitals
2. Holds the immutable GameState
3. Applies actions via the reducer
4. Runs the phase cycle, economy, deck and combat rules
5. Answers legal-action queries for the UI
"""

from .state import (
    GameState,
    GamePhase,
    Player,
    Zone,
    Hex,
    Unit,
    Card,
    CardType,
    UnitStats,
    PlayerPair,
    PlayerResources,
    initial_state,
    zone_owner,
)
from .action import Action, ActionType, ActionResult, Rejection, RejectionKind
from .config import RulesConfig, AttackPhasePolicy, CapitalPlacementPolicy
from .errors import KingdomsError, CapitalPlacementError, InsufficientGold, UnknownActionError
from .grid import (
    generate_board,
    default_board,
    get_adjacent_hexes,
    find_hex_by_coordinates,
    place_capital,
    toggle_resource_generation,
)
from .reducer import Reducer, apply_action, reduce
from .action_generator import (
    ActionGenerator,
    legal_actions,
    is_legal,
    legal_move_targets,
    legal_attack_targets,
    deployable_hexes,
    playable_cards,
)

__all__ = [
    "GameState",
    "GamePhase",
    "Player",
    "Zone",
    "Hex",
    "Unit",
    "Card",
    "CardType",
    "UnitStats",
    "PlayerPair",
    "PlayerResources",
    "initial_state",
    "zone_owner",
    "Action",
    "ActionType",
    "ActionResult",
    "Rejection",
    "RejectionKind",
    "RulesConfig",
    "AttackPhasePolicy",
    "CapitalPlacementPolicy",
    "KingdomsError",
    "CapitalPlacementError",
    "InsufficientGold",
    "UnknownActionError",
    "generate_board",
    "default_board",
    "get_adjacent_hexes",
    "find_hex_by_coordinates",
    "place_capital",
    "toggle_resource_generation",
    "Reducer",
    "apply_action",
    "reduce",
    "ActionGenerator",
    "legal_actions",
    "is_legal",
    "legal_move_targets",
    "legal_attack_targets",
    "deployable_hexes",
    "playable_cards",
]
