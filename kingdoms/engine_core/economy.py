"""
Resource Economy - Gold income, caps and spending.

Income comes from capital hexes flagged to generate resources, but only
as many of them as the player has taken turns: turn 1 unlocks one
generator, turn 2 two, and so on. Each active generator yields 1 gold
per collection. Gold always stays within [0, max_gold].
"""

from __future__ import annotations
import logging

from .errors import InsufficientGold
from .state import GameState, Player

logger = logging.getLogger(__name__)

MAX_GOLD = 20


def clamp_gold(value: int, max_gold: int = MAX_GOLD) -> int:
    return max(0, min(max_gold, value))


def generator_count(state: GameState, player: Player) -> int:
    """Capital hexes of player that are flagged to generate resources."""
    return sum(
        1 for h in state.board
        if h.is_capital_of(player) and h.generate_resource
    )


def active_generators(state: GameState, player: Player) -> int:
    """Generators unlocked by the player's turn ramp."""
    return min(generator_count(state, player), state.turn_number.get(player))


def add_gold(state: GameState, player: Player, amount: int, max_gold: int = MAX_GOLD) -> GameState:
    """Return new state with amount added to player's gold, clamped."""
    current = state.gold_of(player)
    return state.with_gold(player, clamp_gold(current + amount, max_gold))


def can_afford(state: GameState, player: Player, cost: int) -> bool:
    return state.gold_of(player) >= cost


def spend_gold(state: GameState, player: Player, cost: int) -> GameState:
    """
    Return new state with cost deducted from player's gold.

    Raises:
        InsufficientGold: if the player cannot pay in full
    """
    gold = state.gold_of(player)
    if cost > gold:
        raise InsufficientGold(player, cost, gold)
    return state.with_gold(player, gold - cost)


def collect_resources(state: GameState, player: Player, max_gold: int = MAX_GOLD) -> GameState:
    """
    Pay player their income and mark this turn's collection as done.

    Returns:
        New state with gold increased by the active generator count
    """
    generators = generator_count(state, player)
    active = active_generators(state, player)
    turn = state.turn_number.get(player)
    logger.debug(
        "Player %s has %d resource generators, %d active in turn %d",
        player.value, generators, active, turn,
    )

    current = state.gold_of(player)
    new_state = add_gold(state, player, active, max_gold)
    logger.info(
        "Player %s gold: %d + %d = %d", player.value, current, active, new_state.gold_of(player)
    )
    return new_state._copy_with(resources_collected_this_turn=True)
