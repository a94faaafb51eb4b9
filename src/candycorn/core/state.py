"""
State machine for the popover overlay.

States:
    NONE: No popover on screen, the board is interactive
    GAME_START: Title and instructions screen
    COSTUME_REVEAL: A costume was just picked up
    GAME_END: Final screen with fireworks
"""

from enum import Enum, auto
from typing import Callable
import logging

logger = logging.getLogger(__name__)


class PopoverState(Enum):
    """Popover states."""
    NONE = auto()
    GAME_START = auto()
    COSTUME_REVEAL = auto()
    GAME_END = auto()


Listener = Callable[[PopoverState, PopoverState], None]


class StateMachine:
    """
    Tracks which popover is showing and notifies listeners of changes.

    Every visible popover is entered from NONE and left back to NONE.
    Swapping one visible popover for another is a replace, not a pair of
    transitions.
    """

    # Valid state transitions
    VALID_TRANSITIONS: list[tuple[PopoverState, PopoverState]] = [
        # From NONE
        (PopoverState.NONE, PopoverState.GAME_START),
        (PopoverState.NONE, PopoverState.COSTUME_REVEAL),
        (PopoverState.NONE, PopoverState.GAME_END),

        # Explicit removal
        (PopoverState.GAME_START, PopoverState.NONE),
        (PopoverState.COSTUME_REVEAL, PopoverState.NONE),
        (PopoverState.GAME_END, PopoverState.NONE),
    ]

    def __init__(self, initial_state: PopoverState = PopoverState.NONE) -> None:
        self._state = initial_state
        self._listeners: list[Listener] = []
        self._valid_transitions = set(self.VALID_TRANSITIONS)
        logger.debug(f"StateMachine initialized with state: {initial_state.name}")

    @property
    def state(self) -> PopoverState:
        """Get current state."""
        return self._state

    def can_transition(self, to_state: PopoverState) -> bool:
        """Check if transition to given state is valid."""
        return (self._state, to_state) in self._valid_transitions

    def transition(self, to_state: PopoverState) -> bool:
        """
        Attempt to transition to a new state.

        Returns:
            True if transition successful, False otherwise
        """
        if not self.can_transition(to_state):
            logger.warning(
                f"Invalid transition: {self._state.name} -> {to_state.name}"
            )
            return False

        self._set_state(to_state)
        return True

    def replace(self, to_state: PopoverState) -> None:
        """Swap the visible popover for another without passing through NONE."""
        if self._state == PopoverState.NONE or to_state == PopoverState.NONE:
            self.transition(to_state)
            return

        self._set_state(to_state)

    def add_listener(self, callback: Listener) -> None:
        """Add a state change listener."""
        self._listeners.append(callback)

    def _set_state(self, to_state: PopoverState) -> None:
        old_state = self._state
        self._state = to_state

        logger.info(f"Popover transition: {old_state.name} -> {to_state.name}")

        for listener in self._listeners:
            try:
                listener(old_state, to_state)
            except Exception as e:
                logger.error(f"Error in state listener: {e}")
