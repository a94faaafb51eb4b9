"""
Game window using pygame.

Hosts the engine: runs the pending frame callback once per display frame,
presents the composited screen and turns key presses into events.
"""

import asyncio
import logging
from typing import Optional

import numpy as np
import pygame

from candycorn.config.settings import DisplaySettings
from candycorn.core.clock import FrameCallback
from candycorn.core.events import Event, EventBus, EventType, button_press_event, move_event
from candycorn.graphics.renderer import Container

logger = logging.getLogger(__name__)

ARROW_KEYS = {
    pygame.K_LEFT: "left",
    pygame.K_RIGHT: "right",
    pygame.K_UP: "up",
    pygame.K_DOWN: "down",
}


class GameWindow:
    """
    Desktop window that plays the part of the browser's frame scheduler.

    Keyboard Mapping:
        SPACE / RETURN: Continue (dismiss popover)
        ARROWS: Move Jack
        R: Restart the game
        F: Toggle fullscreen
        ESC / Q: Quit
    """

    def __init__(
        self,
        container: Container,
        event_bus: EventBus,
        config: Optional[DisplaySettings] = None,
    ) -> None:
        self.container = container
        self.event_bus = event_bus
        self.config = config or DisplaySettings()

        self._screen: pygame.Surface | None = None
        self._clock: pygame.time.Clock | None = None
        self._running = False
        self._pending: Optional[FrameCallback] = None

        logger.info("GameWindow created")

    def request_frame(self, callback: FrameCallback) -> None:
        """Run callback on the next display frame."""
        self._pending = callback

    def _init_pygame(self) -> None:
        """Initialize pygame and create window."""
        pygame.init()
        pygame.display.set_caption(self.config.title)

        flags = pygame.DOUBLEBUF
        if self.config.fullscreen:
            flags |= pygame.FULLSCREEN

        self._screen = pygame.display.set_mode(
            (self.config.window_width, self.config.window_height),
            flags
        )
        self._clock = pygame.time.Clock()

        logger.info(
            f"Pygame initialized: {self.config.window_width}x{self.config.window_height}"
        )

    def _handle_events(self) -> None:
        """Process pygame events."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self._running = False

            elif event.type == pygame.KEYDOWN:
                self._handle_keydown(event)

    def _handle_keydown(self, event: pygame.event.Event) -> None:
        """Handle key press."""
        key = event.key

        if key == pygame.K_ESCAPE or key == pygame.K_q:
            self._running = False
        elif key == pygame.K_f:
            self._toggle_fullscreen()
        elif key == pygame.K_r:
            self.event_bus.queue_event(Event(EventType.RESTART, source="keyboard"))
        elif key in (pygame.K_SPACE, pygame.K_RETURN):
            self.event_bus.queue_event(button_press_event())
        elif key in ARROW_KEYS:
            self.event_bus.queue_event(move_event(ARROW_KEYS[key]))

    def _run_frame(self) -> None:
        """Run the callback requested by the last frame, if any."""
        callback, self._pending = self._pending, None
        if callback is not None:
            callback()

    def _render(self) -> None:
        """Present the composited screen scaled to fit the window."""
        if not self._screen:
            return

        self._screen.fill((0, 0, 0))

        frame = self.container.composite()
        if frame.size:
            # surfarray wants (width, height, 3)
            surface = pygame.surfarray.make_surface(np.ascontiguousarray(frame.swapaxes(0, 1)))
            screen_w, screen_h = self._screen.get_size()
            scale = min(screen_w / surface.get_width(), screen_h / surface.get_height())
            size = (int(surface.get_width() * scale), int(surface.get_height() * scale))
            scaled = pygame.transform.smoothscale(surface, size)
            self._screen.blit(scaled, ((screen_w - size[0]) // 2, (screen_h - size[1]) // 2))

        pygame.display.flip()

    def _toggle_fullscreen(self) -> None:
        """Toggle fullscreen mode."""
        self.config.fullscreen = not self.config.fullscreen

        if self.config.fullscreen:
            info = pygame.display.Info()
            self._screen = pygame.display.set_mode(
                (info.current_w, info.current_h),
                pygame.FULLSCREEN | pygame.DOUBLEBUF
            )
        else:
            self._screen = pygame.display.set_mode(
                (self.config.window_width, self.config.window_height),
                pygame.DOUBLEBUF
            )

        logger.info(f"Fullscreen: {self.config.fullscreen}")

    async def run(self) -> None:
        """Main window loop."""
        self._init_pygame()
        self._running = True

        logger.info("Window started")

        while self._running:
            self._handle_events()

            # Input is handled between frames
            await self.event_bus.process_queue()

            self._run_frame()
            self._render()

            if self._clock:
                self._clock.tick(self.config.fps)

            # Yield to other tasks
            await asyncio.sleep(0)

        self._cleanup()

    def _cleanup(self) -> None:
        """Clean up pygame resources."""
        pygame.quit()
        logger.info("Window closed")

    def stop(self) -> None:
        """Stop the window loop."""
        self._running = False
