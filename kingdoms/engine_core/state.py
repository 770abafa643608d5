"""
Game State - The single immutable value the engine operates on.

Design principles:
- Immutable: every entity is a frozen dataclass, collections are tuples
- Whole-value replacement: accepted actions return a new GameState,
  rejected actions return the identical previous one
- Explicit "none" cases: zone and capital ownership are total lookups
  returning Player | None, never probed ad hoc
"""

from __future__ import annotations
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Generic, TypeVar

T = TypeVar("T")


class Player(Enum):
    """The two sides of the game."""
    A = "A"
    B = "B"

    @property
    def opponent(self) -> Player:
        return Player.B if self is Player.A else Player.A


class Zone(Enum):
    """Territorial band a hex belongs to."""
    A = "A"
    NEUTRAL = "Neutral"
    B = "B"


def zone_owner(zone: Zone) -> Player | None:
    """Player owning a zone, None for the borderlands."""
    if zone is Zone.A:
        return Player.A
    if zone is Zone.B:
        return Player.B
    return None


def zone_of(player: Player) -> Zone:
    return Zone.A if player is Player.A else Zone.B


class GamePhase(Enum):
    """Turn phases, in cycle order."""
    SETUP = "Setup"
    RESOURCE = "Resource"
    DRAW = "Draw"
    DEV1 = "Dev1"
    MOVEMENT = "Movement"
    COMBAT = "Combat"
    DEV2 = "Dev2"
    END = "End"


DEVELOPMENT_PHASES = frozenset({GamePhase.DEV1, GamePhase.DEV2})


@dataclass(frozen=True)
class Hex:
    """
    A board cell in axial coordinates.

    Identity is (q, r); id is derived from it.
    """
    q: int
    r: int
    zone: Zone
    capital_owner: Player | None = None
    generate_resource: bool = False

    @property
    def id(self) -> str:
        return f"{self.q},{self.r}"

    @property
    def coords(self) -> tuple[int, int]:
        return (self.q, self.r)

    @property
    def owner(self) -> Player | None:
        """Owner of the zone this hex lies in."""
        return zone_owner(self.zone)

    def is_capital_of(self, player: Player) -> bool:
        return self.capital_owner is player


@dataclass(frozen=True)
class Unit:
    """
    A unit on the board.

    Units in a GameState always have hp > 0; combat filters out the dead.
    """
    id: str
    owner: Player
    q: int
    r: int
    ap: int
    hp: int
    has_moved: bool = False

    @property
    def coords(self) -> tuple[int, int]:
        return (self.q, self.r)


class CardType(Enum):
    UNIT = "unit"
    RESOURCE = "resource"
    SPELL = "spell"
    BUILDING = "building"


@dataclass(frozen=True)
class UnitStats:
    ap: int
    hp: int


@dataclass(frozen=True)
class Card:
    """
    An immutable card template.

    Deck construction stamps each copy's id with the owning player, so
    copies in different decks are distinct cards.
    """
    id: str
    name: str
    cost: int
    card_type: CardType
    description: str = ""
    subtype: str | None = None
    unit_stats: UnitStats | None = None
    resource_amount: int | None = None
    effect: str = ""

    def for_player(self, player: Player) -> Card:
        """Copy of this card owned by player."""
        return replace(self, id=f"{self.id}-{player.value}")


@dataclass(frozen=True)
class PlayerPair(Generic[T]):
    """A value held separately for each player."""
    a: T
    b: T

    def get(self, player: Player) -> T:
        return self.a if player is Player.A else self.b

    def with_value(self, player: Player, value: T) -> PlayerPair[T]:
        if player is Player.A:
            return PlayerPair(a=value, b=self.b)
        return PlayerPair(a=self.a, b=value)

    @classmethod
    def of(cls, value: T) -> PlayerPair[T]:
        return cls(a=value, b=value)


@dataclass(frozen=True)
class PlayerResources:
    gold: int = 0


@dataclass(frozen=True)
class GameState:
    """
    Complete game state at a point in time.

    This is the canonical state that the engine operates on.
    All state changes go through the reducer.
    """
    current_player: Player = Player.A
    current_phase: GamePhase = GamePhase.SETUP

    # Per-player counters, each incremented when that player's turn begins
    turn_number: PlayerPair[int] = field(default_factory=lambda: PlayerPair.of(0))

    board: tuple[Hex, ...] = ()
    resources: PlayerPair[PlayerResources] = field(
        default_factory=lambda: PlayerPair.of(PlayerResources())
    )

    game_started: bool = False
    setup_complete: bool = False
    resources_collected_this_turn: bool = False

    units: tuple[Unit, ...] = ()
    selected_unit: str | None = None

    decks: PlayerPair[tuple[Card, ...]] = field(default_factory=lambda: PlayerPair.of(()))
    hands: PlayerPair[tuple[Card, ...]] = field(default_factory=lambda: PlayerPair.of(()))
    selected_card: str | None = None

    # Deterministic id source for spawned units
    next_unit_number: int = 1

    # Seed for deck shuffles
    random_seed: int = 0

    def unit_by_id(self, unit_id: str | None) -> Unit | None:
        """Get a unit by ID."""
        if unit_id is None:
            return None
        for unit in self.units:
            if unit.id == unit_id:
                return unit
        return None

    def unit_at(self, q: int, r: int) -> Unit | None:
        """Get the unit occupying (q, r), if any."""
        for unit in self.units:
            if unit.q == q and unit.r == r:
                return unit
        return None

    def hex_at(self, q: int, r: int) -> Hex | None:
        for hex_ in self.board:
            if hex_.q == q and hex_.r == r:
                return hex_
        return None

    def gold_of(self, player: Player) -> int:
        return self.resources.get(player).gold

    def hand_of(self, player: Player) -> tuple[Card, ...]:
        return self.hands.get(player)

    def deck_of(self, player: Player) -> tuple[Card, ...]:
        return self.decks.get(player)

    def units_of(self, player: Player) -> tuple[Unit, ...]:
        return tuple(u for u in self.units if u.owner is player)

    def with_unit(self, unit: Unit) -> GameState:
        """Return new state with the unit of the same id replaced."""
        new_units = tuple(unit if u.id == unit.id else u for u in self.units)
        return self._copy_with(units=new_units)

    def with_gold(self, player: Player, gold: int) -> GameState:
        """Return new state with player's gold set (no clamping here)."""
        return self._copy_with(
            resources=self.resources.with_value(player, PlayerResources(gold=gold))
        )

    def _copy_with(self, **kwargs) -> GameState:
        """Create a copy with some fields replaced."""
        return replace(self, **kwargs)


def initial_state(starting_player: Player = Player.A, random_seed: int = 0) -> GameState:
    """
    The state a new or reset game begins in.

    Setup phase, empty board, no capitals, zero gold, turn counters at 0,
    empty decks and hands, every flag cleared.
    """
    return GameState(
        current_player=starting_player,
        current_phase=GamePhase.SETUP,
        random_seed=random_seed,
    )
