"""
Game Store - Holds the authoritative game state and dispatches actions.

LIFECYCLE:
1. UI creates a store (one per game window, passed to whoever needs it)
2. UI dispatches actions; the store runs them through the reducer
3. Accepted actions replace the state wholesale and notify subscribers
4. Rejected actions leave the state untouched; the result says why

There is no module-level store. Every consumer receives the store it
should talk to.

The store is single-threaded: one dispatch completes before the next
begins, so no locking is needed.
"""

from __future__ import annotations
import logging
import random
from typing import Callable

from ..engine_core.action import Action, ActionResult
from ..engine_core.action_generator import ActionGenerator
from ..engine_core.config import DEFAULT_CONFIG, RulesConfig
from ..engine_core.reducer import Reducer
from ..engine_core.state import Card, GameState, Hex, initial_state

logger = logging.getLogger(__name__)

Listener = Callable[[GameState, ActionResult], None]


class GameStore:
    """
    The single mutable cell of a game.

    Responsibilities:
    - Hold the current GameState
    - Apply actions through the reducer
    - Notify subscribers after accepted actions
    - Record accepted actions in order
    """

    def __init__(
        self,
        config: RulesConfig | None = None,
        initial: GameState | None = None,
        random_seed: int | None = None,
    ):
        self.config = config or DEFAULT_CONFIG
        self._reducer = Reducer(config=self.config)
        self._generator = ActionGenerator(config=self.config)
        if initial is None:
            seed = random_seed if random_seed is not None else random.randrange(2**31)
            initial = initial_state(random_seed=seed)
        self._state = initial
        self._listeners: list[Listener] = []
        self.history: list[Action] = []

    @property
    def state(self) -> GameState:
        """The current state. Read-only: change it by dispatching."""
        return self._state

    def dispatch(self, action: Action) -> ActionResult:
        """
        Apply an action to the current state.

        Returns the reducer's result; the store's state is replaced only
        when the action was accepted.
        """
        result = self._reducer.apply(self._state, action)
        if not result.success:
            return result

        self._state = result.new_state
        self.history.append(action)
        for listener in list(self._listeners):
            listener(self._state, result)
        return result

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """
        Register a listener called after each accepted action.

        Returns a function that unregisters it.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def snapshot(self):
        """Serializable read-only view of the current state."""
        from ..api.service import snapshot
        return snapshot(self._state)

    # Legal-action queries, for UI highlighting

    def legal_moves(self, unit_id: str) -> list[tuple[int, int]]:
        return self._generator.move_targets(self._state, unit_id)

    def legal_attacks(self, unit_id: str) -> list[str]:
        return self._generator.attack_targets(self._state, unit_id)

    def deployable_hexes(self) -> list[Hex]:
        return self._generator.deployable_hexes(self._state)

    def playable_cards(self) -> list[Card]:
        return self._generator.playable_cards(self._state)

    def legal_actions(self) -> list[Action]:
        return self._generator.generate(self._state)
