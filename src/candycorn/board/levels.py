"""Static level maps.

Each map is a list of tile rows, one character per tile:
``w`` water, ``s`` stone, ``g`` grass. Row 0 is the top of the board.
"""

from dataclasses import dataclass
from typing import Tuple

from candycorn.entities.enemies import EnemyKind
from candycorn.popover.content import CostumeKind

TILE_SPRITES = {
    "w": 'images/water-block.png',
    "s": 'images/stone-block.png',
    "g": 'images/grass-block.png',
}


@dataclass(frozen=True)
class EnemyLane:
    kind: EnemyKind
    row: int
    speed: float
    # Starting columns of every enemy in the lane
    cols: Tuple[float, ...] = (0.0,)
    direction: int = 1


@dataclass(frozen=True)
class LaserSpec:
    row: int
    on_time: float = 1.5
    off_time: float = 1.5
    phase: float = 0.0


@dataclass(frozen=True)
class RockSpec:
    col: int
    row: int
    sprite_id: str = 'images/Rock.png'


@dataclass(frozen=True)
class CostumeSpec:
    kind: CostumeKind
    col: int
    row: int


@dataclass(frozen=True)
class LevelMap:
    tiles: Tuple[str, ...]
    player_start: Tuple[int, int]
    candy_corn: Tuple[int, int]
    enemies: Tuple[EnemyLane, ...] = ()
    rocks: Tuple[RockSpec, ...] = ()
    lasers: Tuple[LaserSpec, ...] = ()
    costumes: Tuple[CostumeSpec, ...] = ()

    @property
    def num_rows(self) -> int:
        return len(self.tiles)

    @property
    def num_cols(self) -> int:
        return len(self.tiles[0])


LEVELS: Tuple[LevelMap, ...] = (
    # 1: rocks and bugs, the dwarf costume
    LevelMap(
        tiles=(
            "wwwww",
            "sssss",
            "sssss",
            "ggggg",
            "ggggg",
            "ggggg",
        ),
        player_start=(2, 5),
        candy_corn=(2, 0),
        enemies=(
            EnemyLane(EnemyKind.BUG, row=1, speed=1.5, cols=(0.0, 3.0)),
            EnemyLane(EnemyKind.BUG, row=2, speed=2.5, cols=(4.0,), direction=-1),
        ),
        rocks=(
            RockSpec(2, 4, 'images/rock-red.png'),
            RockSpec(0, 3, 'images/rock-blue.png'),
            RockSpec(1, 3),
            RockSpec(2, 3, 'images/rock-yellow.png'),
            RockSpec(3, 3),
            RockSpec(4, 3, 'images/pumpkin.png'),
        ),
        costumes=(CostumeSpec(CostumeKind.DWARF, 4, 5),),
    ),
    # 2: lasers, spiders and zombies, the laserman costume
    LevelMap(
        tiles=(
            "wwwwwww",
            "sssssss",
            "ggggggg",
            "sssssss",
            "ggggggg",
            "sssssss",
            "ggggggg",
        ),
        player_start=(3, 6),
        candy_corn=(6, 0),
        enemies=(
            EnemyLane(EnemyKind.SPIDER, row=1, speed=2.0, cols=(0.0, 4.0)),
            EnemyLane(EnemyKind.ZOMBIE, row=3, speed=1.0, cols=(6.0,), direction=-1),
            EnemyLane(EnemyKind.SPIDER, row=5, speed=3.0, cols=(2.0,)),
        ),
        rocks=(
            RockSpec(0, 6, 'images/skull.png'),
            RockSpec(6, 6, 'images/skull.png'),
        ),
        lasers=(
            LaserSpec(row=2, on_time=2.0, off_time=1.0),
            LaserSpec(row=4, on_time=1.5, off_time=1.5, phase=0.75),
        ),
        costumes=(CostumeSpec(CostumeKind.LASERMAN, 5, 6),),
    ),
    # 3: ghosts everywhere, the ghost costume
    LevelMap(
        tiles=(
            "wwwwwwww",
            "ssssssss",
            "ssssssss",
            "gggggggg",
            "ssssssss",
            "ssssssss",
            "gggggggg",
        ),
        player_start=(0, 6),
        candy_corn=(7, 0),
        enemies=(
            EnemyLane(EnemyKind.GHOST, row=1, speed=2.5, cols=(0.0, 4.0)),
            EnemyLane(EnemyKind.GHOST, row=2, speed=1.5, cols=(7.0, 3.0), direction=-1),
            EnemyLane(EnemyKind.ZOMBIE, row=4, speed=1.0, cols=(1.0, 5.0)),
            EnemyLane(EnemyKind.GHOST, row=5, speed=3.5, cols=(6.0,), direction=-1),
        ),
        rocks=(
            RockSpec(3, 3, 'images/pumpkin.png'),
            RockSpec(4, 3, 'images/pumpkin.png'),
        ),
        lasers=(LaserSpec(row=3, on_time=1.0, off_time=2.0),),
        costumes=(CostumeSpec(CostumeKind.GHOST, 2, 6),),
    ),
)
