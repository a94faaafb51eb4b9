"""Static and timed obstacles: rocks and laser beams."""

from candycorn.entities.base import TILE_SIZE, Entity
from candycorn.graphics.primitives import draw_image, fill_rect
from candycorn.graphics.renderer import Canvas
from candycorn.resources import Resources

LASER_COLOR = (255, 40, 40)
LASER_BEAM_HEIGHT = 8


class Rock(Entity):
    """Blocks a tile until a dwarf smashes it."""

    sprite_id = 'images/Rock.png'


class LaserObstacle(Entity):
    """Beam across a whole row that switches on and off on a fixed cycle."""

    sprite_id = 'images/laser-left.png'

    def __init__(
        self,
        canvas: Canvas,
        resources: Resources,
        row: int,
        on_time: float = 1.5,
        off_time: float = 1.5,
        phase: float = 0.0,
    ):
        super().__init__(canvas, resources, 0, row)
        self.on_time = on_time
        self.off_time = off_time
        self.timer = phase % self.period

    @property
    def period(self) -> float:
        return self.on_time + self.off_time

    @property
    def active(self) -> bool:
        return self.timer < self.on_time

    def update(self, dt: float) -> None:
        self.timer = (self.timer + dt) % self.period

    def hits(self, row: int) -> bool:
        return self.active and row == self.row

    def render(self) -> None:
        buffer = self.canvas.buffer
        right_x = self.canvas.width - TILE_SIZE

        # Beam runs between the two emitters' centres
        if self.active:
            beam_y = self.y + (TILE_SIZE - LASER_BEAM_HEIGHT) // 2
            fill_rect(buffer, TILE_SIZE // 2, beam_y, right_x, LASER_BEAM_HEIGHT,
                      LASER_COLOR, alpha=0.8)

        super().render()
        draw_image(buffer, self.resources.get('images/laser-right.png'), right_x, self.y)
