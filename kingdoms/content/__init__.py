"""
Content - Card data shipped with the engine.

Only the deck/hand mechanics are rules; the catalog here is the default
card list decks are built from.
"""

from .cards import DEFAULT_CATALOG, get_card_by_id

__all__ = [
    "DEFAULT_CATALOG",
    "get_card_by_id",
]
