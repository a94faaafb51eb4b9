"""Builds the game and wires input and gameplay events together."""

from typing import Optional
import logging
import random

from candycorn.animation.queue import AnimationQueue
from candycorn.board.manager import BoardManager
from candycorn.config.settings import Settings
from candycorn.core.clock import Clock, FrameRequester
from candycorn.core.events import Event, EventBus, EventType
from candycorn.core.state import PopoverState
from candycorn.engine import BOARD_CANVAS_ID, Engine
from candycorn.entities.base import TILE_SIZE, Entities
from candycorn.graphics.renderer import Canvas, Container
from candycorn.popover.content import CostumeKind
from candycorn.popover.manager import PopoverManager
from candycorn.resources import IMAGE_ASSETS, Resources

logger = logging.getLogger(__name__)

MOVE_DIRECTIONS = {
    EventType.MOVE_LEFT: "left",
    EventType.MOVE_RIGHT: "right",
    EventType.MOVE_UP: "up",
    EventType.MOVE_DOWN: "down",
}

# Popovers the continue button can dismiss
DISMISSABLE = (PopoverState.GAME_START, PopoverState.COSTUME_REVEAL)


class CandyCornGame:
    """Owns every component of one game and reacts to its events."""

    def __init__(
        self,
        settings: Settings,
        clock: Clock,
        frames: FrameRequester,
        event_bus: Optional[EventBus] = None,
        resources: Optional[Resources] = None,
        container: Optional[Container] = None,
        rng: Optional[random.Random] = None,
    ):
        self.settings = settings
        self.event_bus = event_bus or EventBus()
        self.resources = resources or Resources(settings.assets_path)
        rng = rng or random.Random()

        self.container = container or Container()
        self.entities = Entities()
        self.animations = AnimationQueue()
        self.canvas = Canvas.create(BOARD_CANVAS_ID, TILE_SIZE, TILE_SIZE)

        self.board = BoardManager(
            self.canvas,
            self.resources,
            self.entities,
            animations=self.animations,
            event_bus=self.event_bus,
            rng=rng,
            start_level=settings.game.start_level,
        )
        rows, cols = self.board.board_dimensions()
        self.canvas.resize(cols * TILE_SIZE, rows * TILE_SIZE)

        self.popover = PopoverManager(
            self.container,
            self.resources,
            self.canvas,
            clock,
            rng=rng,
            event_bus=self.event_bus,
        )
        self.engine = Engine(
            clock,
            frames,
            self.board,
            self.entities,
            self.animations,
            self.popover,
            self.container,
            canvas=self.canvas,
            max_frame_delta=settings.game.max_frame_delta,
        )

        self._unsubscribers = [
            self.event_bus.subscribe(EventType.BUTTON_PRESS, self._on_button_press),
            self.event_bus.subscribe(EventType.RESTART, self._on_restart),
            self.event_bus.subscribe(EventType.COSTUME_COLLECTED, self._on_costume_collected),
            self.event_bus.subscribe(EventType.LEVEL_COMPLETE, self._on_level_complete),
            self.event_bus.subscribe(EventType.PLAYER_HIT, self._on_player_hit),
            self.event_bus.subscribe(EventType.POPOVER_SHOWN, self._on_popover_change),
            self.event_bus.subscribe(EventType.POPOVER_REMOVED, self._on_popover_change),
        ]
        for event_type in MOVE_DIRECTIONS:
            self._unsubscribers.append(self.event_bus.subscribe(event_type, self._on_move))

    def start(self) -> None:
        """Load the images, then start the engine once they are ready."""
        self.resources.on_ready(self.engine.start)
        self.resources.load(IMAGE_ASSETS)

    def close(self) -> None:
        for unsubscribe in self._unsubscribers:
            unsubscribe()
        self._unsubscribers.clear()

    # -- Input -----------------------------------------------------------

    def _on_button_press(self, event: Event) -> None:
        if self.popover.state in DISMISSABLE:
            self.popover.remove()

    def _on_move(self, event: Event) -> None:
        if self.popover.is_active:
            return
        self.board.move_player(MOVE_DIRECTIONS[event.type])

    def _on_restart(self, event: Event) -> None:
        logger.info("Restarting game")
        self.engine.reset()
        self.popover.show_game_start()

    # -- Gameplay --------------------------------------------------------

    def _on_costume_collected(self, event: Event) -> None:
        kind = CostumeKind(event.data["costume"])
        if self.entities.player is not None:
            self.entities.player.equip(kind)
        self.popover.show_costume_reveal(kind)

    def _on_level_complete(self, event: Event) -> None:
        if not self.board.next_level():
            logger.info("Jack found all the candy corn")
            self.popover.show_game_end()

    def _on_player_hit(self, event: Event) -> None:
        logger.info(f"Jack was hit by {event.data.get('cause', 'something')}")

    def _on_popover_change(self, event: Event) -> None:
        verb = "shown" if event.type == EventType.POPOVER_SHOWN else "removed"
        logger.debug(f"Popover {event.data.get('popover')} {verb}")
