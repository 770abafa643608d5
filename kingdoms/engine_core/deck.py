"""
Deck and Hand - Per-player decks, drawing and hand bookkeeping.

Decks are built once, when the game starts, from the card catalog:
- unit and resource cards: 2 copies each
- building and spell cards: 1 copy each
Every copy's id carries the owning player's suffix, then the deck is
shuffled with the supplied random source.
"""

from __future__ import annotations
import logging
import random
from typing import Iterable

from .state import Card, CardType, GameState, Player

logger = logging.getLogger(__name__)

COPIES_PER_TYPE = {
    CardType.UNIT: 2,
    CardType.RESOURCE: 2,
    CardType.BUILDING: 1,
    CardType.SPELL: 1,
}


def create_player_deck(
    player: Player,
    rng: random.Random,
    catalog: Iterable[Card] | None = None,
) -> tuple[Card, ...]:
    """
    Build a shuffled deck for player.

    Args:
        player: Deck owner, stamped onto every card id
        rng: Random source for the shuffle (seed it for determinism)
        catalog: Card templates to build from (default: the shipped catalog)

    Returns:
        Tuple of cards, top of deck first
    """
    if catalog is None:
        from ..content.cards import DEFAULT_CATALOG
        catalog = DEFAULT_CATALOG

    cards = [card.for_player(player) for card in catalog]

    deck: list[Card] = []
    for card_type in (CardType.UNIT, CardType.RESOURCE, CardType.BUILDING, CardType.SPELL):
        of_type = [c for c in cards if c.card_type is card_type]
        deck.extend(of_type * COPIES_PER_TYPE[card_type])

    rng.shuffle(deck)
    return tuple(deck)


def build_decks(seed: int, catalog: Iterable[Card] | None = None) -> tuple[tuple[Card, ...], tuple[Card, ...]]:
    """Decks for A and B, shuffled from a single seeded source."""
    catalog = tuple(catalog) if catalog is not None else None
    rng = random.Random(seed)
    return (
        create_player_deck(Player.A, rng, catalog),
        create_player_deck(Player.B, rng, catalog),
    )


def draw_card(state: GameState, player: Player) -> GameState | None:
    """
    Move the top card of player's deck into their hand.

    Returns:
        New state, or None if the deck is empty
    """
    deck = state.deck_of(player)
    if not deck:
        return None

    card = deck[0]
    logger.debug("Player %s drew %s", player.value, card.id)
    return state._copy_with(
        decks=state.decks.with_value(player, deck[1:]),
        hands=state.hands.with_value(player, state.hand_of(player) + (card,)),
    )


def find_card_in_hand(state: GameState, player: Player, card_id: str) -> Card | None:
    for card in state.hand_of(player):
        if card.id == card_id:
            return card
    return None


def remove_card_from_hand(state: GameState, player: Player, card_id: str) -> GameState:
    """Return new state without the first hand card with card_id."""
    hand = list(state.hand_of(player))
    for index, card in enumerate(hand):
        if card.id == card_id:
            del hand[index]
            break
    return state._copy_with(hands=state.hands.with_value(player, tuple(hand)))
