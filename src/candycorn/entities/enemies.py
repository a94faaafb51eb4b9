"""Enemies that patrol a single row and wrap around the board edges."""

from enum import Enum

from candycorn.entities.base import TILE_SIZE, Entity
from candycorn.graphics.renderer import Canvas
from candycorn.resources import Resources


class EnemyKind(Enum):
    BUG = "bug"
    GHOST = "ghost"
    SPIDER = "spider"
    ZOMBIE = "zombie"


SPRITES = {
    EnemyKind.BUG: 'images/enemy-bug.png',
    EnemyKind.SPIDER: 'images/spider.png',
    EnemyKind.ZOMBIE: 'images/zombie.png',
}

# How far apart (in tiles) an enemy and Jack must be to miss each other
HIT_DISTANCE = 0.6


class Enemy(Entity):
    """Walks along its row at a constant speed in tiles per second."""

    def __init__(
        self,
        canvas: Canvas,
        resources: Resources,
        kind: EnemyKind,
        row: int,
        speed: float,
        col: float = 0.0,
        direction: int = 1,
    ):
        super().__init__(canvas, resources, col, row)
        self.kind = kind
        self.speed = speed
        self.direction = 1 if direction >= 0 else -1
        # Ghosts show their attacking face when Jack is close
        self.attacking = False

    @property
    def sprite_id(self) -> str:
        if self.kind == EnemyKind.GHOST:
            side = "right" if self.direction > 0 else "left"
            suffix = "-attacking" if self.attacking else ""
            return f'images/ghost-{side}{suffix}.png'
        return SPRITES[self.kind]

    def update(self, dt: float) -> None:
        self.col += self.direction * self.speed * dt

        # Leave one side, come back in from the other
        num_cols = self.canvas.width / TILE_SIZE
        if self.direction > 0 and self.col > num_cols:
            self.col = -1.0
        elif self.direction < 0 and self.col < -1.0:
            self.col = num_cols

    def overlaps(self, col: float, row: int, distance: float = HIT_DISTANCE) -> bool:
        return row == self.row and abs(self.col - col) < distance

