"""
Turn and Phase Cycle.

Phases run in fixed order:

    Setup -> Resource -> Draw -> Dev1 -> Movement -> Combat -> Dev2 -> End
              ^                                                      |
              +------------------------------------------------------+

Setup is visited once. After setup completes, any step that would land
on Setup lands on Resource instead.

Side effects happen on exactly two edges:
- leaving Resource: collect income if not yet collected this turn
- End -> Resource: hand the turn to the other player
"""

from __future__ import annotations
import logging
import random
from dataclasses import replace

from .economy import MAX_GOLD, collect_resources
from .state import GamePhase, GameState, Player

logger = logging.getLogger(__name__)

PHASE_ORDER: tuple[GamePhase, ...] = tuple(GamePhase)


def next_phase(phase: GamePhase, setup_complete: bool) -> GamePhase:
    """The phase after phase in the cycle."""
    index = PHASE_ORDER.index(phase)
    following = PHASE_ORDER[(index + 1) % len(PHASE_ORDER)]
    if following is GamePhase.SETUP and setup_complete:
        return GamePhase.RESOURCE
    return following


def start_turn(state: GameState, player: Player) -> GameState:
    """
    Begin player's turn.

    Only player's own turn counter moves. Their units may move again and
    income becomes collectable.
    """
    units = tuple(
        replace(u, has_moved=False) if u.owner is player else u
        for u in state.units
    )
    turn = state.turn_number.get(player) + 1
    logger.info("Player %s begins turn %d", player.value, turn)
    return state._copy_with(
        current_player=player,
        turn_number=state.turn_number.with_value(player, turn),
        units=units,
        resources_collected_this_turn=False,
    )


def advance_phase(state: GameState, max_gold: int = MAX_GOLD) -> GameState:
    """
    Move to the next phase and run that edge's side effects.

    Returns:
        New state in the following phase
    """
    current = state.current_phase
    following = next_phase(current, state.setup_complete)

    new_state = state
    if (
        current is GamePhase.RESOURCE
        and state.setup_complete
        and not state.resources_collected_this_turn
    ):
        new_state = collect_resources(new_state, new_state.current_player, max_gold)

    if current is GamePhase.END and following is GamePhase.RESOURCE:
        new_state = start_turn(new_state, new_state.current_player.opponent)

    logger.debug("Phase %s -> %s", current.value, following.value)
    return new_state._copy_with(current_phase=following)


def complete_setup(state: GameState, max_gold: int = MAX_GOLD) -> GameState:
    """
    Close the Setup phase and bootstrap the first turn.

    The current player starts turn 1 in the Resource phase with their
    first income already collected.
    """
    player = state.current_player
    new_state = state._copy_with(
        setup_complete=True,
        current_phase=GamePhase.RESOURCE,
        turn_number=state.turn_number.with_value(player, 1),
    )
    logger.info("Setup complete; player %s starts turn 1", player.value)
    return collect_resources(new_state, player, max_gold)


def roll_starting_player(rng: random.Random) -> tuple[int, Player]:
    """
    Roll a d6 to decide who goes first: even -> A, odd -> B.

    Returns:
        (roll, starting player)
    """
    roll = rng.randint(1, 6)
    return roll, (Player.A if roll % 2 == 0 else Player.B)
