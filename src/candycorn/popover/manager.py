"""Modal popover overlay: start screen, costume reveals and the end screen.

Only one popover exists at a time. It draws on its own canvas, which is
attached to the screen container while the popover is visible and detached
when it goes away.
"""

from dataclasses import dataclass
from typing import Optional
import logging
import math
import random

from candycorn.core.clock import Clock
from candycorn.core.events import Event, EventBus, EventType
from candycorn.core.state import PopoverState, StateMachine
from candycorn.graphics.primitives import (
    clear,
    draw_image,
    draw_text_centered,
    draw_text_runs,
    fill,
    text_height,
    text_width,
)
from candycorn.graphics.renderer import Canvas, Container
from candycorn.popover.content import (
    COSTUME_CONTENT,
    POPOVER_COLORS,
    CostumeKind,
    Point,
)
from candycorn.popover.fireworks import Fireworks
from candycorn.resources import Resources

logger = logging.getLogger(__name__)

CANVAS_IDS = {
    PopoverState.GAME_START: "game-start-popover",
    PopoverState.COSTUME_REVEAL: "costume-popover",
    PopoverState.GAME_END: "game-end-popover",
}
POPOVER_Z_ORDER = 100

GAME_START_SIZE = (720, 600)
GAME_END_SIZE = (1280, 700)

# Costume image bobbing
MAX_BOB = 8
BOB_PERIOD_CONTROL = 800
BASE_IMAGE_Y = 60
SPRITE_HALF_WIDTH = 51

# Bitmap font scales standing in for the 32pt / 24pt / 48pt faces
LARGE_TEXT = 6
SMALL_TEXT = 4
BANNER_TEXT = 10


@dataclass
class CostumeData:
    costume_name: str
    caption: str
    sprite_id: str
    image_location: Point
    base_y: float

    def update(self, now_ms: float) -> None:
        """Place the image on a sine wave around base_y.

        Position depends only on the absolute clock reading, so dropped
        frames or pauses never put the bobbing out of phase.
        """
        dy = MAX_BOB * math.sin(now_ms / BOB_PERIOD_CONTROL)
        self.image_location.y = self.base_y + dy

    def rebase(self, base_y: float) -> None:
        """Move the oscillation centre, keeping the current phase."""
        self.image_location.y += base_y - self.base_y
        self.base_y = base_y


class PopoverManager:
    """Owns the single popover overlay and its animation state."""

    def __init__(
        self,
        container: Container,
        resources: Resources,
        board_canvas: Canvas,
        clock: Clock,
        rng: Optional[random.Random] = None,
        event_bus: Optional[EventBus] = None,
    ):
        self._container = container
        self._resources = resources
        self._board_canvas = board_canvas
        self._clock = clock
        self._rng = rng or random.Random()
        self._event_bus = event_bus

        self._state = StateMachine()
        self._surface: Optional[Canvas] = None
        self.costume_data: Optional[CostumeData] = None
        self.fireworks: Optional[Fireworks] = None

    @property
    def state(self) -> PopoverState:
        return self._state.state

    @property
    def is_active(self) -> bool:
        return self._state.state != PopoverState.NONE

    @property
    def surface(self) -> Optional[Canvas]:
        """The popover's canvas while one is showing."""
        return self._surface

    def add_listener(self, callback) -> None:
        """Be told (old, new) on every popover change."""
        self._state.add_listener(callback)

    # -- Showing ---------------------------------------------------------

    def show_game_start(self) -> None:
        """Static title screen, drawn once."""
        surface = self._open(PopoverState.GAME_START, *GAME_START_SIZE)
        buffer = surface.buffer
        center = surface.width / 2
        gray = POPOVER_COLORS["gray"]
        orange = POPOVER_COLORS["orange"]

        fill(buffer, POPOVER_COLORS["blue_gray"])

        self._text_runs(buffer, [("This is ", gray), ("Jack", orange), (":", gray)],
                        center, 80, LARGE_TEXT)
        self._text(buffer, "Help Jack find the", center, 300, gray, LARGE_TEXT)
        self._text(buffer, "CANDYCORN", center, 350, orange, LARGE_TEXT)
        self._text(buffer, "he dropped while", center, 390, gray, LARGE_TEXT)
        self._text(buffer, "trick-or-treating!", center, 430, gray, LARGE_TEXT)
        self._continue_hint(buffer, center, 560, SMALL_TEXT)

        draw_image(buffer, self._resources.get('images/jack.png'),
                   center - SPRITE_HALF_WIDTH, 60)

    def show_costume_reveal(self, kind: CostumeKind) -> None:
        """Announce a costume over the board, with its picture bobbing."""
        if not isinstance(kind, CostumeKind):
            raise TypeError(f"Expected a CostumeKind, got {kind!r}")

        content = COSTUME_CONTENT[kind]
        surface = self._open(
            PopoverState.COSTUME_REVEAL,
            self._board_canvas.width,
            self._board_canvas.height,
        )
        self.costume_data = CostumeData(
            costume_name=content.display_name,
            caption=content.caption,
            sprite_id=content.sprite_id,
            image_location=Point(surface.width / 2 - SPRITE_HALF_WIDTH, BASE_IMAGE_Y),
            base_y=BASE_IMAGE_Y,
        )

    def present_dwarf(self) -> None:
        self.show_costume_reveal(CostumeKind.DWARF)

    def present_laserman(self) -> None:
        self.show_costume_reveal(CostumeKind.LASERMAN)

    def present_ghost(self) -> None:
        self.show_costume_reveal(CostumeKind.GHOST)

    def show_game_end(self) -> None:
        """Final screen with the banner and fireworks."""
        surface = self._open(PopoverState.GAME_END, *GAME_END_SIZE)
        self.fireworks = Fireworks(surface.width, surface.height, self._rng)
        self._render_game_end()

    # -- Removal ---------------------------------------------------------

    def remove(self) -> None:
        """Take down the current popover. Does nothing if none is showing."""
        if not self.is_active:
            return

        old_state = self.state
        self._discard_surface()
        self._state.transition(PopoverState.NONE)
        self._emit(EventType.POPOVER_REMOVED, old_state)

    # -- Per frame -------------------------------------------------------

    def update(self, dt: float) -> None:
        if self.state == PopoverState.COSTUME_REVEAL:
            self.costume_data.update(self._clock.now())
        elif self.state == PopoverState.GAME_END:
            self.fireworks.update(dt)

    def render(self) -> None:
        if self.state == PopoverState.COSTUME_REVEAL:
            self._render_costume()
        elif self.state == PopoverState.GAME_END:
            self._render_game_end()

    def _render_costume(self) -> None:
        surface = self._surface
        buffer = surface.buffer
        data = self.costume_data
        center = surface.width / 2
        height = surface.height
        max_width = surface.width - 20

        clear(buffer)
        fill(buffer, POPOVER_COLORS["blue_gray"], alpha=0.9)

        self._text(buffer, data.costume_name, center, 0.1 * height,
                   POPOVER_COLORS["orange"],
                   _fit_scale(data.costume_name, max_width, LARGE_TEXT))
        self._text(buffer, data.caption, center, 0.7 * height,
                   POPOVER_COLORS["white"],
                   _fit_scale(data.caption, max_width, SMALL_TEXT))
        self._text(buffer, "COSTUME", center, 0.2 * height,
                   POPOVER_COLORS["gray"], SMALL_TEXT)
        self._continue_hint(buffer, center, 0.9 * height,
                            _fit_scale("[ space ] to continue", max_width, SMALL_TEXT))

        data.rebase(0.25 * height)
        data.image_location.x = center - SPRITE_HALF_WIDTH
        draw_image(buffer, self._resources.get(data.sprite_id),
                   data.image_location.x, data.image_location.y)

    def _render_game_end(self) -> None:
        surface = self._surface
        buffer = surface.buffer

        clear(buffer)
        fill(buffer, POPOVER_COLORS["blue_gray"])
        self._text(buffer, "Happy Halloween", surface.width / 2, surface.height / 2,
                   POPOVER_COLORS["orange"], BANNER_TEXT)

        self.fireworks.render(buffer)

    # -- Helpers ---------------------------------------------------------

    def _open(self, state: PopoverState, width: int, height: int) -> Canvas:
        """Create the canvas for a new popover, replacing any current one."""
        if self.is_active:
            logger.debug(f"Replacing {self.state.name} popover with {state.name}")
            self._discard_surface()
            self._state.replace(state)
        else:
            self._state.transition(state)

        self._surface = self._container.attach(
            Canvas.create(CANVAS_IDS[state], width, height, z_order=POPOVER_Z_ORDER)
        )
        self._emit(EventType.POPOVER_SHOWN, state)
        return self._surface

    def _discard_surface(self) -> None:
        if self._surface is not None:
            self._container.detach(self._surface.name)
        self._surface = None
        self.costume_data = None
        self.fireworks = None

    def _emit(self, event_type: EventType, state: PopoverState) -> None:
        if self._event_bus:
            self._event_bus.emit(Event(
                event_type, data={"popover": state.name}, source="popover"
            ))

    @staticmethod
    def _text(buffer, text, center_x, baseline, color, scale) -> None:
        draw_text_centered(buffer, text, center_x, int(baseline) - text_height(scale),
                           color, scale)

    @staticmethod
    def _text_runs(buffer, runs, center_x, baseline, scale) -> None:
        draw_text_runs(buffer, runs, center_x, int(baseline) - text_height(scale), scale)

    def _continue_hint(self, buffer, center_x, baseline, scale) -> None:
        gray = POPOVER_COLORS["gray"]
        self._text_runs(
            buffer,
            [("[ ", gray), ("space", POPOVER_COLORS["orange"]), (" ] to continue", gray)],
            center_x, baseline, scale,
        )


def _fit_scale(text: str, max_width: int, preferred: int) -> int:
    """Largest scale up to preferred at which text fits in max_width."""
    scale = preferred
    while scale > 1 and text_width(text, scale) > max_width:
        scale -= 1
    return scale
