"""Particle emitter for one-shot visual effects."""

from typing import Optional, List, Tuple
from dataclasses import dataclass
import random
import math
import numpy as np
from numpy.typing import NDArray

from candycorn.graphics.primitives import fill_rect


@dataclass
class Particle:
    """A single particle with physics properties. Times are in seconds."""

    x: float
    y: float
    vx: float = 0.0
    vy: float = 0.0
    ay: float = 0.0  # acceleration y (gravity)
    size: float = 1.0
    size_end: float = 0.0
    color: Tuple[int, int, int] = (255, 255, 255)
    alpha: float = 1.0
    alpha_end: float = 0.0
    lifetime: float = 1.0
    age: float = 0.0
    active: bool = True

    @property
    def progress(self) -> float:
        """Get normalized lifetime progress (0.0 to 1.0)."""
        if self.lifetime <= 0:
            return 1.0
        return min(1.0, self.age / self.lifetime)

    @property
    def is_dead(self) -> bool:
        """Check if particle has expired."""
        return self.age >= self.lifetime

    def update(self, dt: float) -> None:
        """Update particle physics."""
        if not self.active:
            return

        self.vy += self.ay * dt
        self.x += self.vx * dt
        self.y += self.vy * dt

        self.age += dt

        if self.is_dead:
            self.active = False

    def get_current_size(self) -> float:
        """Get interpolated size based on lifetime."""
        t = self.progress
        return self.size + (self.size_end - self.size) * t

    def get_current_alpha(self) -> float:
        """Get interpolated alpha based on lifetime."""
        t = self.progress
        return self.alpha + (self.alpha_end - self.alpha) * t


@dataclass
class EmitterConfig:
    """Configuration for a particle emitter."""

    # Position
    x: float = 0.0
    y: float = 0.0

    # Emission
    burst: int = 12

    # Velocity
    speed_min: float = 60.0
    speed_max: float = 220.0
    angle_min: float = 180.0  # Degrees, 270 is straight up
    angle_max: float = 360.0

    # Physics
    gravity: float = 600.0  # Pixels per second squared

    # Appearance
    size_min: float = 6.0
    size_max: float = 14.0
    size_end: float = 2.0
    color: Tuple[int, int, int] = (140, 140, 140)
    color_variance: float = 0.0  # Random color variation (0-1)
    alpha_start: float = 1.0
    alpha_end: float = 0.0

    # Lifetime
    lifetime_min: float = 0.35
    lifetime_max: float = 0.7


class ParticleEmitter:
    """Emits and manages particles."""

    def __init__(
        self,
        config: EmitterConfig | None = None,
        rng: Optional[random.Random] = None,
    ):
        self.config = config or EmitterConfig()
        self.particles: List[Particle] = []
        self._rng = rng or random.Random()

    def emit(self, count: int = 1) -> None:
        """Emit a specified number of particles."""
        for _ in range(count):
            self.particles.append(self._create_particle())

    def burst(self, count: Optional[int] = None) -> None:
        """Emit a burst of particles."""
        self.emit(count or self.config.burst)

    def _create_particle(self) -> Particle:
        """Create a new particle with randomized properties."""
        cfg = self.config
        rng = self._rng

        angle_rad = math.radians(rng.uniform(cfg.angle_min, cfg.angle_max))
        speed = rng.uniform(cfg.speed_min, cfg.speed_max)

        return Particle(
            x=cfg.x,
            y=cfg.y,
            vx=math.cos(angle_rad) * speed,
            vy=math.sin(angle_rad) * speed,
            ay=cfg.gravity,
            size=rng.uniform(cfg.size_min, cfg.size_max),
            size_end=cfg.size_end,
            color=self._vary_color(cfg.color, cfg.color_variance),
            alpha=cfg.alpha_start,
            alpha_end=cfg.alpha_end,
            lifetime=rng.uniform(cfg.lifetime_min, cfg.lifetime_max),
        )

    def _vary_color(
        self,
        color: Tuple[int, int, int],
        variance: float
    ) -> Tuple[int, int, int]:
        """Apply random variance to a color."""
        if variance <= 0:
            return color

        def vary_channel(c: int) -> int:
            delta = int(c * variance * self._rng.uniform(-1, 1))
            return max(0, min(255, c + delta))

        return (
            vary_channel(color[0]),
            vary_channel(color[1]),
            vary_channel(color[2]),
        )

    def update(self, dt: float) -> None:
        """Update all live particles."""
        for particle in self.particles:
            if particle.active:
                particle.update(dt)

    def render(self, buffer: NDArray[np.uint8]) -> None:
        """Render all particles to a buffer as small squares."""
        for particle in self.particles:
            if not particle.active:
                continue

            size = particle.get_current_size()
            alpha = particle.get_current_alpha()
            if alpha <= 0 or size <= 0:
                continue

            half = size / 2
            fill_rect(
                buffer,
                int(particle.x - half),
                int(particle.y - half),
                max(1, int(size)),
                max(1, int(size)),
                particle.color,
                alpha,
            )

    def get_active_count(self) -> int:
        """Get the number of active particles."""
        return sum(1 for p in self.particles if p.active)
