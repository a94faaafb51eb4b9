"""Things Jack picks up: costumes and the candy corn."""

import math

from candycorn.entities.base import Entity
from candycorn.graphics.primitives import draw_image
from candycorn.graphics.renderer import Canvas
from candycorn.popover.content import COSTUME_CONTENT, CostumeKind
from candycorn.resources import Resources

# Gentle hover for costumes lying on the board
HOVER_AMPLITUDE = 6
HOVER_SPEED = 3.0


class Costume(Entity):
    def __init__(self, canvas: Canvas, resources: Resources, kind: CostumeKind,
                 col: int, row: int):
        super().__init__(canvas, resources, col, row, COSTUME_CONTENT[kind].sprite_id)
        self.kind = kind
        self.elapsed = 0.0

    @property
    def y(self) -> float:
        return super().y + HOVER_AMPLITUDE * math.sin(self.elapsed * HOVER_SPEED)

    def update(self, dt: float) -> None:
        self.elapsed += dt


class CandyCorn(Entity):
    """The level goal, drawn on top of a selector tile."""

    sprite_id = 'images/candy-corn.png'

    def render(self) -> None:
        draw_image(self.canvas.buffer, self.resources.get('images/Selector.png'),
                   self.x, self.y)
        super().render()
