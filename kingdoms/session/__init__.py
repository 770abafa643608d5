"""
Session Module - Holds the live game for a UI.

A GameStore represents one play-through:
- Created when the UI opens a game
- Holds the current game state
- Dispatches UI actions through the reducer
- Notifies the UI so it can re-render

Stores are EPHEMERAL: nothing is persisted.
"""

from .store import GameStore, Listener

__all__ = [
    "GameStore",
    "Listener",
]
