"""Three looping firework rings for the end-of-game popover.

Each ring grows one property and shrinks another at its own speed. When the
shrinking property drops below zero the ring restarts at a random spot in a
random palette colour.
"""

from dataclasses import dataclass, field
from typing import Iterator, Optional, Tuple
import random

import numpy as np
from numpy.typing import NDArray

from candycorn.graphics.primitives import Color, draw_ring
from candycorn.popover.content import POPOVER_COLORS, Point

FIREWORK_PALETTE: Tuple[Color, ...] = (
    POPOVER_COLORS["white"],
    POPOVER_COLORS["orange"],
    POPOVER_COLORS["green"],
)


@dataclass(frozen=True)
class RingRule:
    """How one ring evolves per second of elapsed time."""
    speed: float
    grows: str
    grow_rate: float
    shrinks: str
    shrink_rate: float
    # Value the shrinking property restarts from
    restart_value: float


# Line widens while fading out
WIDENING_RING = RingRule(speed=4, grows="stroke_width", grow_rate=100,
                         shrinks="alpha", shrink_rate=1, restart_value=1.0)
# Circle expands while fading out
EXPANDING_RING = RingRule(speed=5, grows="radius", grow_rate=18,
                          shrinks="alpha", shrink_rate=1, restart_value=1.0)
# Circle expands while its line thins out
THINNING_RING = RingRule(speed=20, grows="radius", grow_rate=10,
                         shrinks="stroke_width", shrink_rate=3, restart_value=15.0)


@dataclass
class FireworkParticle:
    radius: float
    stroke_width: float
    alpha: float
    rule: RingRule
    center: Point = field(default_factory=Point)
    color: Color = POPOVER_COLORS["orange"]

    def update(self, dt: float, width: int, height: int, rng: random.Random) -> None:
        rule = self.rule
        ds = rule.speed * dt
        setattr(self, rule.grows, getattr(self, rule.grows) + rule.grow_rate * ds)
        setattr(self, rule.shrinks, getattr(self, rule.shrinks) - rule.shrink_rate * ds)

        # Restart animation at a new random location
        if getattr(self, rule.shrinks) < 0:
            setattr(self, rule.shrinks, rule.restart_value)
            setattr(self, rule.grows, 0.0)
            self.center = Point(rng.randint(0, width), rng.randint(0, height))
            self.color = rng.choice(FIREWORK_PALETTE)


class Fireworks:
    """Fixed set of three rings updated in place every frame."""

    def __init__(self, width: int, height: int, rng: Optional[random.Random] = None):
        self.width = width
        self.height = height
        self._rng = rng or random.Random()
        self.particles: Tuple[FireworkParticle, FireworkParticle, FireworkParticle] = (
            FireworkParticle(radius=50, stroke_width=0, alpha=1, rule=WIDENING_RING),
            FireworkParticle(radius=0, stroke_width=10, alpha=1, rule=EXPANDING_RING),
            FireworkParticle(radius=0, stroke_width=20, alpha=1, rule=THINNING_RING),
        )

    def __iter__(self) -> Iterator[FireworkParticle]:
        return iter(self.particles)

    def __len__(self) -> int:
        return len(self.particles)

    def __getitem__(self, index: int) -> FireworkParticle:
        return self.particles[index]

    def update(self, dt: float) -> None:
        for particle in self.particles:
            particle.update(dt, self.width, self.height, self._rng)

    def render(self, buffer: NDArray[np.uint8]) -> None:
        for particle in self.particles:
            draw_ring(
                buffer,
                particle.center.x,
                particle.center.y,
                particle.radius,
                particle.stroke_width,
                particle.color,
                particle.alpha,
            )
