"""Time source and frame scheduling seams for the game loop.

The engine never reads the system clock or talks to the display directly.
It is handed a ``Clock`` and a ``FrameRequester``; the pygame window provides
the real frame requester, tests provide fakes that single-step the loop.
"""

from typing import Callable, Protocol
import time


FrameCallback = Callable[[], None]


class Clock(Protocol):
    """Absolute time source in milliseconds."""

    def now(self) -> float:
        ...


class FrameRequester(Protocol):
    """Runs a callback once, when the host is ready to draw the next frame."""

    def request_frame(self, callback: FrameCallback) -> None:
        ...


class SystemClock:
    """Wall-clock milliseconds since the epoch."""

    def now(self) -> float:
        return time.time() * 1000.0
