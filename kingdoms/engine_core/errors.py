"""
Engine errors.

Rules violations never raise out of the reducer - they come back as
rejected ActionResults. These exceptions cover programming errors and
internal signalling between the rules modules and the reducer.
"""


class KingdomsError(Exception):
    """Base class for engine errors."""


class CapitalPlacementError(KingdomsError, ValueError):
    """Raised when a capital may not be placed at the requested hex."""


class InsufficientGold(KingdomsError):
    """Raised when a spend would drive a player's gold below zero."""

    def __init__(self, player, cost: int, gold: int):
        self.player = player
        self.cost = cost
        self.gold = gold
        super().__init__(f"Player {player.value} has {gold} gold, needs {cost}")


class UnknownActionError(KingdomsError, KeyError):
    """Raised when no handler is registered for an action type."""
