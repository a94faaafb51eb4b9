"""Levels and the board they are played on."""

from candycorn.board.levels import (
    LEVELS,
    TILE_SPRITES,
    CostumeSpec,
    EnemyLane,
    LaserSpec,
    LevelMap,
    RockSpec,
)
from candycorn.board.manager import BoardManager, Dimensions

__all__ = [
    "LEVELS",
    "TILE_SPRITES",
    "CostumeSpec",
    "EnemyLane",
    "LaserSpec",
    "LevelMap",
    "RockSpec",
    "BoardManager",
    "Dimensions",
]
