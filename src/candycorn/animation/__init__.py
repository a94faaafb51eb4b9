"""Animation module for CANDYCORN."""

from candycorn.animation.queue import AnimationQueue, FiniteAnimation
from candycorn.animation.particles import Particle, ParticleEmitter, EmitterConfig
from candycorn.animation.smash import SmashAnimation

__all__ = [
    # Queue
    "AnimationQueue",
    "FiniteAnimation",
    # Particles
    "Particle",
    "ParticleEmitter",
    "EmitterConfig",
    # Effects
    "SmashAnimation",
]
