"""Level state: tiles, static obstacles, collectibles and collision rules."""

from typing import List, NamedTuple, Optional, Sequence
import logging
import random

from candycorn.animation.queue import AnimationQueue
from candycorn.animation.smash import SmashAnimation
from candycorn.board.levels import LEVELS, TILE_SPRITES, LevelMap
from candycorn.core.events import Event, EventBus, EventType
from candycorn.entities.base import TILE_SIZE, Entities
from candycorn.entities.collectibles import CandyCorn, Costume
from candycorn.entities.enemies import Enemy, EnemyKind
from candycorn.entities.obstacles import LaserObstacle, Rock
from candycorn.entities.player import Player
from candycorn.graphics.primitives import clear, draw_image
from candycorn.graphics.renderer import Canvas
from candycorn.popover.content import CostumeKind
from candycorn.resources import Resources

logger = logging.getLogger(__name__)

# Ghosts look scary within this many tiles of Jack
GHOST_ATTACK_DISTANCE = 1.5


class Dimensions(NamedTuple):
    num_rows: int
    num_cols: int


class BoardManager:
    """Builds levels from their maps and applies the collision rules.

    Enemies and Jack live in the shared ``Entities`` so the engine can update
    them; everything else on the board is owned here.
    """

    def __init__(
        self,
        canvas: Canvas,
        resources: Resources,
        entities: Entities,
        animations: Optional[AnimationQueue] = None,
        event_bus: Optional[EventBus] = None,
        levels: Sequence[LevelMap] = LEVELS,
        rng: Optional[random.Random] = None,
        start_level: int = 1,
    ):
        if not levels:
            raise ValueError("At least one level is required")
        if not 1 <= start_level <= len(levels):
            raise ValueError(f"Start level {start_level} out of range")

        self.canvas = canvas
        self.resources = resources
        self.entities = entities
        self.animations = animations
        self.event_bus = event_bus
        self.levels = tuple(levels)
        self._rng = rng or random.Random()
        self.start_level = start_level

        self.current_level = 0
        self.level_map: Optional[LevelMap] = None
        self.rocks: List[Rock] = []
        self.lasers: List[LaserObstacle] = []
        self.costumes: List[Costume] = []
        self.candy_corn: Optional[CandyCorn] = None
        self._level_complete = False

    # -- Dimensions ------------------------------------------------------

    def board_dimensions(self) -> Dimensions:
        """Size of the first level, used before any level is loaded."""
        first = self.levels[0]
        return Dimensions(first.num_rows, first.num_cols)

    def current_level_dimensions(self) -> Dimensions:
        if self.level_map is None:
            return self.board_dimensions()
        return Dimensions(self.level_map.num_rows, self.level_map.num_cols)

    @property
    def is_last_level(self) -> bool:
        return self.current_level >= len(self.levels)

    # -- Levels ----------------------------------------------------------

    def load_level(self, number: int) -> None:
        """Build level ``number`` (1-based) and put Jack on its start tile."""
        if not 1 <= number <= len(self.levels):
            raise ValueError(f"No level {number}, there are {len(self.levels)}")

        level = self.levels[number - 1]
        self.current_level = number
        self.level_map = level
        self._level_complete = False

        canvas, resources = self.canvas, self.resources
        self.rocks = [Rock(canvas, resources, r.col, r.row, r.sprite_id) for r in level.rocks]
        self.lasers = [
            LaserObstacle(canvas, resources, l.row, l.on_time, l.off_time, l.phase)
            for l in level.lasers
        ]
        self.costumes = [Costume(canvas, resources, c.kind, c.col, c.row) for c in level.costumes]
        self.candy_corn = CandyCorn(canvas, resources, *level.candy_corn)

        # Replace in place so holders of the list keep seeing the live enemies
        self.entities.enemies[:] = [
            Enemy(canvas, resources, lane.kind, lane.row, lane.speed, col, lane.direction)
            for lane in level.enemies
            for col in lane.cols
        ]

        if self.entities.player is None:
            self.entities.player = Player(canvas, resources, level.player_start)
        self.entities.player.board = self
        self.entities.player.place(level.player_start)

        logger.info(f"Loaded level {number} ({level.num_cols}x{level.num_rows})")

    def next_level(self) -> bool:
        """Advance to the next level. Returns False after the last one."""
        if self.is_last_level:
            return False
        self.load_level(self.current_level + 1)
        return True

    def reset(self) -> None:
        """Back to the start level with no costume."""
        if self.animations:
            self.animations.stop_all()
        self.load_level(self.start_level)
        self.entities.player.equip(None)

    # -- Queries ---------------------------------------------------------

    def obstacles(self) -> List[LaserObstacle]:
        """Obstacles that change over time."""
        return list(self.lasers)

    def in_bounds(self, col: int, row: int) -> bool:
        rows, cols = self.current_level_dimensions()
        return 0 <= col < cols and 0 <= row < rows

    def rock_at(self, col: int, row: int) -> Optional[Rock]:
        for rock in self.rocks:
            if rock.tile == (col, row):
                return rock
        return None

    def is_blocked(self, col: int, row: int) -> bool:
        return self.rock_at(col, row) is not None

    # -- Changes ---------------------------------------------------------

    def smash_rock(self, col: int, row: int) -> bool:
        """Break the rock on a tile. Returns False if there was none."""
        rock = self.rock_at(col, row)
        if rock is None:
            return False

        self.rocks.remove(rock)
        if self.animations:
            center = (rock.x + TILE_SIZE / 2, rock.y + TILE_SIZE / 2)
            self.animations.play(SmashAnimation(self.canvas, center, rock.sprite_id, self._rng))
        self._emit(EventType.ROCK_SMASHED, {"col": col, "row": row})
        return True

    def move_player(self, direction: str) -> bool:
        player = self.entities.player
        if player is None:
            return False
        return player.handle_input(direction)

    def update_costumes(self, dt: float) -> None:
        for costume in self.costumes:
            costume.update(dt)

    def check_collisions(self) -> None:
        player = self.entities.player
        if player is None:
            return

        for enemy in self.entities.enemies:
            if enemy.kind == EnemyKind.GHOST:
                enemy.attacking = enemy.overlaps(player.col, player.row, GHOST_ATTACK_DISTANCE)

        if not player.is_recovering:
            if player.costume != CostumeKind.GHOST and any(
                enemy.overlaps(player.col, player.row) for enemy in self.entities.enemies
            ):
                self._hit(player, "enemy")
                return

            if player.costume != CostumeKind.LASERMAN and any(
                laser.hits(player.row) for laser in self.lasers
            ):
                self._hit(player, "laser")
                return

        for costume in list(self.costumes):
            if costume.tile == player.tile:
                self.costumes.remove(costume)
                logger.info(f"Jack found the {costume.kind.name} costume")
                self._emit(EventType.COSTUME_COLLECTED, {"costume": costume.kind})

        # Handlers may load another level, so this goes last
        if (
            not self._level_complete
            and self.candy_corn is not None
            and self.candy_corn.tile == player.tile
        ):
            self._level_complete = True
            logger.info(f"Level {self.current_level} complete")
            self._emit(EventType.LEVEL_COMPLETE, {"level": self.current_level})

    def _hit(self, player: Player, cause: str) -> None:
        logger.debug(f"Jack hit by {cause}")
        player.respawn()
        self._emit(EventType.PLAYER_HIT, {"cause": cause})

    # -- Drawing ---------------------------------------------------------

    def render_board(self) -> None:
        """Draw tiles and everything on them except enemies and Jack."""
        buffer = self.canvas.buffer
        clear(buffer)

        if self.level_map is not None:
            for row, tiles in enumerate(self.level_map.tiles):
                for col, tile in enumerate(tiles):
                    sprite = self.resources.get(TILE_SPRITES[tile])
                    draw_image(buffer, sprite, col * TILE_SIZE, row * TILE_SIZE)

        if self.candy_corn is not None:
            self.candy_corn.render()
        for rock in self.rocks:
            rock.render()
        for laser in self.lasers:
            laser.render()
        for costume in self.costumes:
            costume.render()

    def _emit(self, event_type: EventType, data: dict) -> None:
        if self.event_bus:
            self.event_bus.emit(Event(event_type, data=data, source="board"))
