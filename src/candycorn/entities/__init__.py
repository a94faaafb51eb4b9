"""Board actors for CANDYCORN."""

from candycorn.entities.base import TILE_SIZE, Entities, Entity
from candycorn.entities.collectibles import CandyCorn, Costume
from candycorn.entities.enemies import Enemy, EnemyKind
from candycorn.entities.obstacles import LaserObstacle, Rock
from candycorn.entities.player import DIRECTIONS, Player

__all__ = [
    "TILE_SIZE",
    "Entities",
    "Entity",
    "CandyCorn",
    "Costume",
    "Enemy",
    "EnemyKind",
    "LaserObstacle",
    "Rock",
    "DIRECTIONS",
    "Player",
]
