"""Jack, the player character."""

from typing import Dict, Optional, Tuple, TYPE_CHECKING
import logging

from candycorn.entities.base import Entity
from candycorn.graphics.primitives import draw_image
from candycorn.graphics.renderer import Canvas
from candycorn.popover.content import COSTUME_CONTENT, CostumeKind
from candycorn.resources import Resources

if TYPE_CHECKING:
    from candycorn.board.manager import BoardManager

logger = logging.getLogger(__name__)

DIRECTIONS: Dict[str, Tuple[int, int]] = {
    "left": (-1, 0),
    "right": (1, 0),
    "up": (0, -1),
    "down": (0, 1),
}

# Seconds of blinking immunity after being sent back to the start
RECOVERY_TIME = 1.0
BLINK_INTERVAL = 0.1


class Player(Entity):
    sprite_id = 'images/jack.png'

    def __init__(self, canvas: Canvas, resources: Resources, start: Tuple[int, int]):
        super().__init__(canvas, resources, start[0], start[1])
        self.start = start
        self.costume: Optional[CostumeKind] = None
        self.recovering = 0.0
        # Set by the BoardManager that places Jack
        self.board: Optional["BoardManager"] = None

    @property
    def is_recovering(self) -> bool:
        return self.recovering > 0

    def target(self, direction: str) -> Tuple[int, int]:
        """The tile one step away in the given direction."""
        if direction not in DIRECTIONS:
            raise ValueError(f"Unknown direction: {direction}")
        dc, dr = DIRECTIONS[direction]
        col, row = self.tile
        return col + dc, row + dr

    def handle_input(self, direction: str) -> bool:
        """Step one tile if the board allows it. Returns True if Jack moved."""
        if self.board is None:
            logger.debug("Jack is not on a board yet, ignoring input")
            return False

        col, row = self.target(direction)
        if not self.board.in_bounds(col, row):
            return False

        if self.board.is_blocked(col, row):
            if self.costume != CostumeKind.DWARF:
                return False
            self.board.smash_rock(col, row)

        self.move_to(col, row)
        return True

    def move_to(self, col: int, row: int) -> None:
        self.col = col
        self.row = row

    def place(self, start: Tuple[int, int]) -> None:
        """Put Jack on a new level's start tile."""
        self.start = start
        self.move_to(*start)
        self.recovering = 0.0

    def respawn(self) -> None:
        logger.debug(f"Jack respawns at {self.start}")
        self.move_to(*self.start)
        self.recovering = RECOVERY_TIME

    def equip(self, costume: Optional[CostumeKind]) -> None:
        self.costume = costume

    def update(self, dt: float) -> None:
        if self.recovering > 0:
            self.recovering = max(0.0, self.recovering - dt)

    def render(self) -> None:
        # Skip every other blink interval while recovering
        if self.is_recovering and int(self.recovering / BLINK_INTERVAL) % 2:
            return

        super().render()
        if self.costume is not None:
            sprite = self.resources.get(COSTUME_CONTENT[self.costume].sprite_id)
            draw_image(self.canvas.buffer, sprite, self.x, self.y)
