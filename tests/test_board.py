"""
Board Tests

Tests for level loading, player movement, rock smashing and the collision
rules applied by the BoardManager.

Run with: pytest tests/test_board.py -v
"""

import pytest

from candycorn.board import LEVELS, BoardManager, Dimensions
from candycorn.core.events import EventType
from candycorn.entities import EnemyKind, LaserObstacle
from candycorn.entities.enemies import Enemy
from candycorn.popover.content import CostumeKind


@pytest.fixture
def level1(board):
    board.load_level(1)
    return board


class TestLevels:
    """Level loading and progression."""

    def test_dimensions_before_loading(self, board):
        assert board.current_level == 0
        assert board.board_dimensions() == Dimensions(6, 5)
        assert board.current_level_dimensions() == Dimensions(6, 5)

    def test_levels_differ_in_size(self):
        sizes = {(level.num_rows, level.num_cols) for level in LEVELS}
        assert len(sizes) == len(LEVELS)

    def test_load_first_level(self, level1, entities):
        player = entities.player
        assert level1.current_level == 1
        assert player.tile == (2, 5)
        assert len(entities.enemies) == 3
        assert len(level1.rocks) == 6
        assert [c.kind for c in level1.costumes] == [CostumeKind.DWARF]
        assert level1.candy_corn.tile == (2, 0)
        assert level1.obstacles() == []

    def test_enemy_list_kept_across_levels(self, level1, entities):
        enemies = entities.enemies
        level1.load_level(2)
        assert entities.enemies is enemies
        assert {e.kind for e in enemies} == {EnemyKind.SPIDER, EnemyKind.ZOMBIE}

    def test_player_kept_across_levels(self, level1, entities):
        player = entities.player
        level1.load_level(2)
        assert entities.player is player
        assert player.tile == (3, 6)

    def test_current_dimensions_follow_level(self, level1):
        level1.load_level(3)
        assert level1.current_level_dimensions() == Dimensions(7, 8)
        assert level1.board_dimensions() == Dimensions(6, 5)

    def test_next_level(self, level1):
        assert level1.next_level() is True
        assert level1.current_level == 2
        assert level1.next_level() is True
        assert level1.next_level() is False
        assert level1.current_level == 3

    def test_invalid_level(self, board):
        with pytest.raises(ValueError):
            board.load_level(0)
        with pytest.raises(ValueError):
            board.load_level(len(LEVELS) + 1)

    def test_no_levels_rejected(self, board_canvas, resources, entities):
        with pytest.raises(ValueError):
            BoardManager(board_canvas, resources, entities, levels=())

    def test_reset(self, level1, entities, animations):
        entities.player.equip(CostumeKind.DWARF)
        level1.smash_rock(2, 4)
        level1.load_level(3)

        level1.reset()

        assert level1.current_level == 1
        assert entities.player.costume is None
        assert len(level1.rocks) == 6
        assert animations.count == 0

    def test_start_level(self, board_canvas, resources, entities):
        board = BoardManager(board_canvas, resources, entities, start_level=2)
        board.reset()
        assert board.current_level == 2


class TestMovement:
    """Player input on the board."""

    def test_move_into_free_tile(self, level1, entities):
        assert level1.move_player("right") is True
        assert entities.player.tile == (3, 5)

    def test_cannot_leave_board(self, level1, entities):
        assert level1.move_player("down") is False
        assert entities.player.tile == (2, 5)

    def test_rock_blocks(self, level1, entities):
        assert level1.is_blocked(2, 4)
        assert level1.move_player("up") is False
        assert entities.player.tile == (2, 5)

    def test_dwarf_smashes_rock(self, level1, entities, animations, event_bus):
        entities.player.equip(CostumeKind.DWARF)

        assert level1.move_player("up") is True

        assert entities.player.tile == (2, 4)
        assert not level1.is_blocked(2, 4)
        assert animations.count == 1
        smashed = event_bus.get_history(EventType.ROCK_SMASHED)
        assert smashed[-1].data == {"col": 2, "row": 4}

    def test_smash_empty_tile(self, level1, animations):
        assert level1.smash_rock(0, 0) is False
        assert animations.count == 0

    def test_unknown_direction(self, level1, entities):
        with pytest.raises(ValueError):
            entities.player.handle_input("sideways")

    def test_move_without_player(self, board):
        assert board.move_player("left") is False


class TestCollisions:
    """Collision outcomes."""

    def test_costume_pickup(self, level1, entities, event_bus):
        level1.move_player("right")
        level1.move_player("right")
        level1.check_collisions()

        collected = event_bus.get_history(EventType.COSTUME_COLLECTED)
        assert collected[-1].data == {"costume": CostumeKind.DWARF}
        assert level1.costumes == []

    def test_enemy_sends_player_back(self, level1, entities, event_bus):
        player = entities.player
        level1.move_player("right")
        enemy = entities.enemies[0]
        enemy.row, enemy.col = player.row, player.col

        level1.check_collisions()

        assert player.tile == (2, 5)
        assert player.is_recovering
        assert event_bus.get_history(EventType.PLAYER_HIT)[-1].data == {"cause": "enemy"}

    def test_ghost_costume_ignores_enemies(self, level1, entities):
        player = entities.player
        player.equip(CostumeKind.GHOST)
        level1.move_player("right")
        enemy = entities.enemies[0]
        enemy.row, enemy.col = player.row, player.col

        level1.check_collisions()

        assert player.tile == (3, 5)

    def test_recovering_player_is_immune(self, level1, entities, event_bus):
        player = entities.player
        enemy = entities.enemies[0]
        enemy.row, enemy.col = player.row, player.col

        level1.check_collisions()
        level1.check_collisions()

        assert len(event_bus.get_history(EventType.PLAYER_HIT)) == 1

        player.update(2.0)
        level1.check_collisions()
        assert len(event_bus.get_history(EventType.PLAYER_HIT)) == 2

    def test_active_laser_hits(self, board, entities, event_bus):
        board.load_level(2)
        player = entities.player
        player.move_to(3, 4)

        board.check_collisions()

        assert player.tile == (3, 6)
        assert event_bus.get_history(EventType.PLAYER_HIT)[-1].data == {"cause": "laser"}

    def test_laserman_ignores_lasers(self, board, entities):
        board.load_level(2)
        player = entities.player
        player.equip(CostumeKind.LASERMAN)
        player.move_to(3, 4)

        board.check_collisions()

        assert player.tile == (3, 4)

    def test_inactive_laser_is_safe(self, board, entities):
        board.load_level(2)
        laser = board.lasers[1]
        laser.update(laser.on_time)
        assert not laser.active

        entities.player.move_to(3, 4)
        board.check_collisions()
        assert entities.player.tile == (3, 4)

    def test_candy_corn_completes_level_once(self, level1, entities, event_bus):
        entities.player.move_to(2, 0)

        level1.check_collisions()
        level1.check_collisions()

        completed = event_bus.get_history(EventType.LEVEL_COMPLETE)
        assert len(completed) == 1
        assert completed[0].data == {"level": 1}

    def test_ghost_attacks_when_close(self, board, entities):
        board.load_level(3)
        ghost = entities.enemies[0]
        assert ghost.kind == EnemyKind.GHOST

        entities.player.move_to(1, ghost.row)
        board.check_collisions()

        assert ghost.attacking
        assert ghost.sprite_id == 'images/ghost-right-attacking.png'

    def test_no_player_no_collisions(self, board):
        board.check_collisions()


class TestEntities:
    """Per-entity behaviour."""

    def test_enemy_wraps_right(self, board_canvas, resources):
        enemy = Enemy(board_canvas, resources, EnemyKind.BUG, row=1, speed=1.0, col=4.9)
        enemy.update(0.2)
        assert enemy.col == -1.0

    def test_enemy_wraps_left(self, board_canvas, resources):
        enemy = Enemy(board_canvas, resources, EnemyKind.ZOMBIE, row=1, speed=1.0,
                      col=-0.9, direction=-1)
        enemy.update(0.2)
        assert enemy.col == 5.0

    def test_laser_cycle(self, board_canvas, resources):
        laser = LaserObstacle(board_canvas, resources, row=2, on_time=1.0, off_time=1.0)
        assert laser.active
        laser.update(1.0)
        assert not laser.active
        assert not laser.hits(2)
        laser.update(1.0)
        assert laser.hits(2)
        assert not laser.hits(3)

    def test_costume_hovers(self, level1):
        costume = level1.costumes[0]
        resting = costume.y
        level1.update_costumes(0.5)
        assert costume.y != resting
        assert costume.tile == (4, 5)

    def test_render_board_draws(self, level1, board_canvas):
        level1.render_board()
        assert board_canvas.buffer[..., 3].any()
