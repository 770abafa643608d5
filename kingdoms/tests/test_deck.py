"""
Tests for decks, hands and the card catalog.
"""

import random
from collections import Counter

from ..content import DEFAULT_CATALOG, get_card_by_id
from ..engine_core.deck import (
    build_decks,
    create_player_deck,
    draw_card,
    find_card_in_hand,
    remove_card_from_hand,
)
from ..engine_core.state import Card, CardType, GameState, Player, PlayerPair


class TestCatalog:
    """Tests for the shipped cards."""

    def test_catalog_contents(self):
        types = Counter(card.card_type for card in DEFAULT_CATALOG)
        assert types[CardType.UNIT] == 3
        assert types[CardType.RESOURCE] == 2
        assert types[CardType.BUILDING] == 2
        assert types[CardType.SPELL] == 2

    def test_unit_cards_carry_stats(self):
        knight = get_card_by_id("unit-3")
        assert knight.name == "Knight"
        assert knight.unit_stats.ap == 4
        assert knight.unit_stats.hp == 5

    def test_unknown_card(self):
        assert get_card_by_id("unit-99") is None


class TestCreateDeck:
    """Tests for deck construction."""

    def test_copies_per_type(self):
        """Units and resources twice, buildings and spells once."""
        deck = create_player_deck(Player.A, random.Random(0))

        counts = Counter(card.id for card in deck)
        assert len(deck) == 14
        assert counts["unit-1-A"] == 2
        assert counts["resource-2-A"] == 2
        assert counts["building-1-A"] == 1
        assert counts["spell-2-A"] == 1

    def test_ids_carry_owner(self):
        deck = create_player_deck(Player.B, random.Random(0))
        assert all(card.id.endswith("-B") for card in deck)

    def test_same_seed_same_order(self):
        assert build_decks(99) == build_decks(99)

    def test_decks_are_shuffled(self):
        """Different seeds give different orders (for these seeds)."""
        orders = {tuple(c.id for c in build_decks(seed)[0]) for seed in range(5)}
        assert len(orders) > 1

    def test_custom_catalog(self):
        catalog = [Card(id="spell-x", name="Test", cost=1, card_type=CardType.SPELL)]
        deck = create_player_deck(Player.A, random.Random(0), catalog)
        assert [c.id for c in deck] == ["spell-x-A"]


class TestDrawCard:
    """Tests for drawing and hand bookkeeping."""

    def _state(self) -> GameState:
        deck_a, deck_b = build_decks(7)
        return GameState(decks=PlayerPair(a=deck_a, b=deck_b))

    def test_draw_moves_top_card(self):
        state = self._state()
        top = state.deck_of(Player.A)[0]

        new_state = draw_card(state, Player.A)

        assert new_state.hand_of(Player.A) == (top,)
        assert len(new_state.deck_of(Player.A)) == 13
        assert new_state.deck_of(Player.B) == state.deck_of(Player.B)

    def test_draw_from_empty_deck(self):
        assert draw_card(GameState(), Player.A) is None

    def test_remove_first_matching_copy(self):
        """Duplicate copies share an id; only one leaves the hand."""
        card = get_card_by_id("unit-1").for_player(Player.A)
        state = GameState(hands=PlayerPair(a=(card, card), b=()))

        assert find_card_in_hand(state, Player.A, "unit-1-A") == card
        new_state = remove_card_from_hand(state, Player.A, "unit-1-A")
        assert new_state.hand_of(Player.A) == (card,)

    def test_remove_missing_card_keeps_hand(self):
        card = get_card_by_id("spell-1").for_player(Player.B)
        state = GameState(hands=PlayerPair(a=(), b=(card,)))
        new_state = remove_card_from_hand(state, Player.B, "spell-2-B")
        assert new_state.hand_of(Player.B) == (card,)
