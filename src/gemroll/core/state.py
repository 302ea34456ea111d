"""
State machine for a Gemroll session.

States:
    IDLE: Before the first start, waiting for the start command
    RUNNING: Tick loop active, the ball is in play
    GAME_OVER: All lives lost; display frozen until restart
"""

from enum import Enum, auto
from dataclasses import dataclass
from typing import Callable, Any
import logging

logger = logging.getLogger(__name__)


class State(Enum):
    """Session states."""
    IDLE = auto()
    RUNNING = auto()
    GAME_OVER = auto()


@dataclass
class StateContext:
    """Context data carried across transitions."""
    final_score: int | None = None
    sessions_started: int = 0


Listener = Callable[[State, State, StateContext], None]


class StateMachine:
    """
    Manages session state and transitions.

    Only the transitions listed in VALID_TRANSITIONS are accepted;
    anything else is logged and rejected.
    """

    VALID_TRANSITIONS: list[tuple[State, State]] = [
        (State.IDLE, State.RUNNING),
        (State.RUNNING, State.GAME_OVER),
        (State.GAME_OVER, State.RUNNING),  # Play again
    ]

    def __init__(self, initial_state: State = State.IDLE) -> None:
        self._state = initial_state
        self._context = StateContext()
        self._listeners: list[Listener] = []
        self._valid_transitions = set(self.VALID_TRANSITIONS)
        logger.info(f"StateMachine initialized with state: {initial_state.name}")

    @property
    def state(self) -> State:
        """Get current state."""
        return self._state

    @property
    def context(self) -> StateContext:
        """Get current context."""
        return self._context

    @property
    def is_running(self) -> bool:
        return self._state is State.RUNNING

    def can_transition(self, to_state: State) -> bool:
        """Check if transition to given state is valid."""
        return (self._state, to_state) in self._valid_transitions

    def transition(self, to_state: State, **context_updates: Any) -> bool:
        """
        Attempt to transition to a new state.

        Args:
            to_state: Target state
            **context_updates: Attributes of StateContext to overwrite

        Returns:
            True if transition successful, False otherwise
        """
        if not self.can_transition(to_state):
            logger.warning(
                f"Invalid transition: {self._state.name} -> {to_state.name}"
            )
            return False

        old_state = self._state
        self._state = to_state

        for key, value in context_updates.items():
            if hasattr(self._context, key):
                setattr(self._context, key, value)

        logger.info(f"State transition: {old_state.name} -> {to_state.name}")

        for listener in list(self._listeners):
            try:
                listener(old_state, to_state, self._context)
            except Exception as e:
                logger.error(f"Error in state listener: {e}")

        return True

    def add_listener(self, callback: Listener) -> None:
        """Add a state change listener."""
        self._listeners.append(callback)

    def remove_listener(self, callback: Listener) -> None:
        """Remove a state change listener."""
        if callback in self._listeners:
            self._listeners.remove(callback)
