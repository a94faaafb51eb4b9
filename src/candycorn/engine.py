"""The frame scheduler that drives the game.

Each frame the engine measures the time since the previous one, updates
every game object with that delta, renders them back to front onto the
board canvas and asks the host for the next frame.
"""

from typing import Optional
import logging

from candycorn.animation.queue import AnimationQueue
from candycorn.board.manager import BoardManager
from candycorn.core.clock import Clock, FrameRequester
from candycorn.entities.base import TILE_SIZE, Entities
from candycorn.graphics.renderer import Canvas, Container
from candycorn.popover.manager import PopoverManager

logger = logging.getLogger(__name__)

BOARD_CANVAS_ID = "board"
DEFAULT_MAX_FRAME_DELTA = 0.25


class Engine:
    """Runs the update/render loop one frame at a time.

    The engine never blocks: after each frame it hands ``_main`` back to the
    frame requester and returns.
    """

    def __init__(
        self,
        clock: Clock,
        frames: FrameRequester,
        board: BoardManager,
        entities: Entities,
        animations: AnimationQueue,
        popover: PopoverManager,
        container: Container,
        canvas: Optional[Canvas] = None,
        max_frame_delta: float = DEFAULT_MAX_FRAME_DELTA,
    ):
        self.clock = clock
        self.frames = frames
        self.board = board
        self.entities = entities
        self.animations = animations
        self.popover = popover
        self.container = container
        self.max_frame_delta = max_frame_delta

        if canvas is None:
            rows, cols = board.board_dimensions()
            canvas = Canvas.create(BOARD_CANVAS_ID, cols * TILE_SIZE, rows * TILE_SIZE)
        self._canvas = canvas
        if canvas not in container:
            container.attach(canvas)

        self.last_frame_timestamp: Optional[float] = None
        self._frame_count = 0

    @property
    def canvas(self) -> Canvas:
        """The surface the board is drawn on."""
        return self._canvas

    @property
    def frame_count(self) -> int:
        return self._frame_count

    def start(self) -> None:
        """Reset the game, show the title popover and run the first frame."""
        logger.info("Engine starting")
        self.reset()
        self.last_frame_timestamp = self.clock.now()
        self.popover.show_game_start()
        self._main()

    def reset(self) -> None:
        self.animations.stop_all()
        self.board.reset()

    def _main(self) -> None:
        now = self.clock.now()
        dt = (now - self.last_frame_timestamp) / 1000.0
        # A long stall (hidden window, breakpoint) must not teleport anything
        dt = min(max(dt, 0.0), self.max_frame_delta)

        self.update(dt)
        self.render()

        self.last_frame_timestamp = now
        self._frame_count += 1
        self.frames.request_frame(self._main)

    def update(self, dt: float) -> None:
        rows, cols = self.board.current_level_dimensions()
        self._canvas.resize(cols * TILE_SIZE, rows * TILE_SIZE)

        for enemy in self.entities.enemies:
            enemy.update(dt)
        if self.entities.player is not None:
            self.entities.player.update(dt)
        else:
            logger.debug("No player to update")

        for obstacle in self.board.obstacles():
            obstacle.update(dt)

        self.board.update_costumes(dt)
        self.animations.update(dt)
        self.popover.update(dt)
        self.board.check_collisions()

    def render(self) -> None:
        self.board.render_board()
        self.animations.render()

        for enemy in self.entities.enemies:
            enemy.render()
        if self.entities.player is not None:
            self.entities.player.render()
        else:
            logger.debug("No player to render")

        self.popover.render()
