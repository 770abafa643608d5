"""
Card Catalog - The canonical card list decks are built from.

Card content is data. Deck construction duplicates unit and resource
cards and includes building and spell cards once.
"""

from __future__ import annotations

from ..engine_core.state import Card, CardType, UnitStats


# ============================================================================
# Units
# ============================================================================

FOOTMAN = Card(
    id="unit-1",
    name="Footman",
    cost=3,
    card_type=CardType.UNIT,
    subtype="infantry",
    effect="Basic infantry unit",
    description="A loyal soldier equipped with a sword and shield.",
    unit_stats=UnitStats(ap=2, hp=4),
)

ARCHER = Card(
    id="unit-2",
    name="Archer",
    cost=4,
    card_type=CardType.UNIT,
    subtype="ranged",
    effect="Ranged attack unit",
    description="Skilled with a bow, can attack from a distance.",
    unit_stats=UnitStats(ap=3, hp=2),
)

KNIGHT = Card(
    id="unit-3",
    name="Knight",
    cost=6,
    card_type=CardType.UNIT,
    subtype="cavalry",
    effect="Heavy cavalry unit",
    description="Mounted warrior with heavy armor and lance.",
    unit_stats=UnitStats(ap=4, hp=5),
)


# ============================================================================
# Resources
# ============================================================================

GOLD_MINE = Card(
    id="resource-1",
    name="Gold Mine",
    cost=2,
    card_type=CardType.RESOURCE,
    effect="Gain 3 gold",
    description="Miners extract precious gold from beneath the earth.",
    resource_amount=3,
)

ROYAL_TREASURY = Card(
    id="resource-2",
    name="Royal Treasury",
    cost=4,
    card_type=CardType.RESOURCE,
    effect="Gain 5 gold",
    description="A fortified vault holding the kingdom's wealth.",
    resource_amount=5,
)


# ============================================================================
# Buildings
# ============================================================================

WATCHTOWER = Card(
    id="building-1",
    name="Watchtower",
    cost=3,
    card_type=CardType.BUILDING,
    effect="Reveals adjacent hexes",
    description="A tall structure providing visibility over the surrounding area.",
)

BARRACKS = Card(
    id="building-2",
    name="Barracks",
    cost=5,
    card_type=CardType.BUILDING,
    effect="Reduces unit cost by 1",
    description="A training ground for soldiers, reducing recruitment costs.",
)


# ============================================================================
# Spells
# ============================================================================

HEALING_PRAYER = Card(
    id="spell-1",
    name="Healing Prayer",
    cost=2,
    card_type=CardType.SPELL,
    effect="Heal a unit for 2 HP",
    description="A divine blessing that mends wounds and restores strength.",
)

FIREBALL = Card(
    id="spell-2",
    name="Fireball",
    cost=3,
    card_type=CardType.SPELL,
    effect="Deal 2 damage to a unit",
    description="A ball of arcane fire that burns enemies.",
)


DEFAULT_CATALOG: tuple[Card, ...] = (
    FOOTMAN,
    ARCHER,
    KNIGHT,
    GOLD_MINE,
    ROYAL_TREASURY,
    WATCHTOWER,
    BARRACKS,
    HEALING_PRAYER,
    FIREBALL,
)


def get_card_by_id(card_id: str) -> Card | None:
    """Look up a catalog card by its template id."""
    for card in DEFAULT_CATALOG:
        if card.id == card_id:
            return card
    return None
