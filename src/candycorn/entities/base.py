"""Shared base for everything that sits on the board grid."""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple, TYPE_CHECKING

from candycorn.graphics.primitives import draw_image
from candycorn.graphics.renderer import Canvas
from candycorn.resources import Resources

if TYPE_CHECKING:
    from candycorn.entities.enemies import Enemy
    from candycorn.entities.player import Player

TILE_SIZE = 101


class Entity:
    """A sprite placed on the grid.

    ``col`` may be fractional for things that glide between tiles; ``row``
    is always a whole row.
    """

    sprite_id: str = 'images/Rock.png'

    def __init__(
        self,
        canvas: Canvas,
        resources: Resources,
        col: float,
        row: int,
        sprite_id: Optional[str] = None,
    ):
        self.canvas = canvas
        self.resources = resources
        self.col = col
        self.row = row
        if sprite_id:
            self.sprite_id = sprite_id

    @property
    def x(self) -> float:
        return self.col * TILE_SIZE

    @property
    def y(self) -> float:
        return self.row * TILE_SIZE

    @property
    def tile(self) -> Tuple[int, int]:
        """The grid cell the entity is mostly in."""
        return int(round(self.col)), self.row

    def update(self, dt: float) -> None:
        pass

    def render(self) -> None:
        draw_image(self.canvas.buffer, self.resources.get(self.sprite_id), self.x, self.y)


@dataclass
class Entities:
    """The moving actors: enemies in update order, and Jack once he exists."""

    enemies: List["Enemy"] = field(default_factory=list)
    player: Optional["Player"] = None
