"""Rock-smashing effect played when the dwarf breaks a rock."""

from typing import Optional, Tuple
import random

from candycorn.animation.particles import EmitterConfig, ParticleEmitter
from candycorn.animation.queue import FiniteAnimation
from candycorn.graphics.renderer import Canvas

# Fragment colour per rock sprite
ROCK_COLORS = {
    'images/rock-red.png': (196, 64, 52),
    'images/rock-blue.png': (70, 110, 200),
    'images/rock-yellow.png': (230, 190, 60),
    'images/pumpkin.png': (255, 140, 20),
    'images/skull.png': (230, 230, 220),
}
DEFAULT_ROCK_COLOR = (140, 140, 140)


class SmashAnimation(FiniteAnimation):
    """A single burst of fragments that falls apart and fades."""

    def __init__(
        self,
        canvas: Canvas,
        center: Tuple[float, float],
        sprite_id: str = 'images/Rock.png',
        rng: Optional[random.Random] = None,
    ):
        self.canvas = canvas
        config = EmitterConfig(
            x=center[0],
            y=center[1],
            burst=16,
            color=ROCK_COLORS.get(sprite_id, DEFAULT_ROCK_COLOR),
            color_variance=0.2,
        )
        self.emitter = ParticleEmitter(config, rng)
        self.emitter.burst()

    def update(self, dt: float) -> None:
        self.emitter.update(dt)

    def render(self) -> None:
        self.emitter.render(self.canvas.buffer)

    @property
    def is_finished(self) -> bool:
        return self.emitter.get_active_count() == 0
