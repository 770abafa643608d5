"""
Pytest fixtures for Kingdoms tests.

Board used throughout: 15 x 8, so rows 0-2 are zone A, rows 3-4 the
borderlands and rows 5-7 zone B. A's capital sits at (7, 1) with three
generators, B's at (7, 6) with two.
"""

import pytest

from ..engine_core.action import Action
from ..engine_core.grid import generate_board, place_capital, toggle_resource_generation
from ..engine_core.reducer import Reducer
from ..engine_core.state import (
    GamePhase,
    GameState,
    Player,
    PlayerPair,
    PlayerResources,
    Unit,
    initial_state,
)

GENERATORS_A = ((7, 1), (8, 1), (6, 1))
GENERATORS_B = ((7, 6), (8, 6))


@pytest.fixture
def reducer() -> Reducer:
    """Reducer with the standard rules."""
    return Reducer()


@pytest.fixture
def board():
    """Default-sized board with no capitals."""
    return generate_board(15, 8)


@pytest.fixture
def capital_board(board):
    """Board with both capitals placed and generators switched on."""
    board = place_capital(board, Player.A, 7, 1)
    board = place_capital(board, Player.B, 7, 6)
    for q, r in GENERATORS_A + GENERATORS_B:
        board = toggle_resource_generation(board, q, r)
    return board


@pytest.fixture
def fresh_state() -> GameState:
    """A brand new game in Setup."""
    return initial_state(random_seed=42)


@pytest.fixture
def started_state(fresh_state: GameState, board, reducer: Reducer) -> GameState:
    """Game started by A, board laid out, no capitals yet."""
    state = reducer.apply(fresh_state, Action.start_game(Player.A)).new_state
    return reducer.apply(state, Action.set_board(board)).new_state


@pytest.fixture
def setup_state(started_state: GameState, reducer: Reducer) -> GameState:
    """Capitals and generators placed through actions, setup not yet completed."""
    actions = [
        Action.place_capital(Player.A, 7, 1),
        Action.place_capital(Player.B, 7, 6),
    ]
    actions.extend(Action.toggle_resource_generation(q, r) for q, r in GENERATORS_A + GENERATORS_B)

    state = started_state
    for action in actions:
        result = reducer.apply(state, action)
        assert result.success, result.error
        state = result.new_state
    return state


@pytest.fixture
def playing_state(setup_state: GameState, reducer: Reducer) -> GameState:
    """Setup completed: A in the Resource phase of turn 1 with 1 gold."""
    result = reducer.apply(setup_state, Action.complete_setup())
    assert result.success, result.error
    return result.new_state


@pytest.fixture
def combat_state(capital_board) -> GameState:
    """
    Mid-game Movement phase, A to act.

    unit-A-1 (ap 3, hp 5) at (5, 2) stands next to unit-B-2 (ap 4, hp 2)
    at (6, 2). Both players hold 10 gold.
    """
    return GameState(
        current_player=Player.A,
        current_phase=GamePhase.MOVEMENT,
        turn_number=PlayerPair(a=2, b=1),
        board=capital_board,
        resources=PlayerPair.of(PlayerResources(gold=10)),
        game_started=True,
        setup_complete=True,
        resources_collected_this_turn=True,
        units=(
            Unit(id="unit-A-1", owner=Player.A, q=5, r=2, ap=3, hp=5),
            Unit(id="unit-B-2", owner=Player.B, q=6, r=2, ap=4, hp=2),
        ),
        next_unit_number=3,
        random_seed=42,
    )
