"""
Kingdoms & Castles - Hex-Grid Strategy Rules Engine

A deterministic, reducer-driven engine for a two-player turn-based
hex-grid strategy game. The engine provides:
- An immutable game state value
- A closed action vocabulary
- A pure transition function (the reducer)
- Legal-action queries for UI layers
"""

__version__ = "0.1.0"
