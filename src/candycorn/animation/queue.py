"""Queue of finite, self-removing animations drawn on the board."""

from abc import ABC, abstractmethod
from typing import Optional, Callable, Dict
from dataclasses import dataclass
import logging

logger = logging.getLogger(__name__)


class FiniteAnimation(ABC):
    """An animation that runs once and then reports itself finished."""

    @abstractmethod
    def update(self, dt: float) -> None:
        """Advance by dt seconds."""

    @abstractmethod
    def render(self) -> None:
        """Draw the current frame."""

    @property
    @abstractmethod
    def is_finished(self) -> bool:
        ...


@dataclass
class ActiveAnimation:
    """Wrapper for a queued animation with its completion callback."""

    animation: FiniteAnimation
    on_complete: Optional[Callable[[], None]] = None


class AnimationQueue:
    """Holds the finite animations currently on screen.

    Animations are updated and rendered in the order they were played and
    are dropped from the queue on the update that finishes them.
    """

    def __init__(self):
        self._animations: Dict[str, ActiveAnimation] = {}
        self._counter = 0

        logger.debug("AnimationQueue initialized")

    def play(
        self,
        animation: FiniteAnimation,
        name: Optional[str] = None,
        on_complete: Optional[Callable[[], None]] = None,
    ) -> str:
        """Start playing an animation.

        Args:
            animation: The animation to run
            name: Unique name for this animation instance
            on_complete: Callback when animation finishes

        Returns:
            The animation name/id
        """
        self._counter += 1
        anim_name = name or f"{type(animation).__name__.lower()}_{self._counter}"

        if anim_name in self._animations:
            self.stop(anim_name)

        self._animations[anim_name] = ActiveAnimation(animation, on_complete)
        logger.debug(f"Animation started: {anim_name}")
        return anim_name

    def stop(self, name: str) -> bool:
        """Remove an animation without running its completion callback."""
        if name not in self._animations:
            return False

        del self._animations[name]
        logger.debug(f"Animation stopped: {name}")
        return True

    def stop_all(self) -> int:
        """Stop all animations. Returns the number stopped."""
        count = len(self._animations)
        self._animations.clear()
        return count

    def update(self, dt: float) -> None:
        """Advance every animation and drop the ones that finished."""
        completed = []

        for name, active in self._animations.items():
            active.animation.update(dt)
            if active.animation.is_finished:
                completed.append(name)

        for name in completed:
            active = self._animations.pop(name)
            logger.debug(f"Animation completed: {name}")
            if active.on_complete:
                active.on_complete()

    def render(self) -> None:
        """Draw every animation."""
        for active in self._animations.values():
            active.animation.render()

    def has_animation(self, name: str) -> bool:
        """Check if an animation exists."""
        return name in self._animations

    @property
    def count(self) -> int:
        """Get the number of active animations."""
        return len(self._animations)
