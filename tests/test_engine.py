"""
Engine Tests

Tests for the frame scheduler: frame timing, update/render ordering and
robustness when the player does not exist yet.

Run with: pytest tests/test_engine.py -v
"""

import logging

import pytest

from candycorn.animation.smash import SmashAnimation
from candycorn.board.manager import Dimensions
from candycorn.core.state import PopoverState
from candycorn.engine import Engine
from candycorn.entities.base import Entities
from candycorn.graphics.renderer import Canvas, Container


class Recorder:
    """Collaborator stand-ins that log every call into one shared list."""

    def __init__(self, log, name, dimensions=Dimensions(6, 5)):
        self.log = log
        self.name = name
        self.dimensions = dimensions

    # Board
    def board_dimensions(self):
        return self.dimensions

    def current_level_dimensions(self):
        return self.dimensions

    def obstacles(self):
        return [Recorder(self.log, "obstacle")]

    def update_costumes(self, dt):
        self.log.append("costumes.update")

    def check_collisions(self):
        self.log.append("collisions")

    def render_board(self):
        self.log.append("board.render")

    def reset(self):
        self.log.append(f"{self.name}.reset")

    # Entities, animations and popover
    def update(self, dt):
        self.log.append(f"{self.name}.update")

    def render(self):
        self.log.append(f"{self.name}.render")

    def stop_all(self):
        self.log.append(f"{self.name}.stop_all")

    def show_game_start(self):
        self.log.append(f"{self.name}.show_game_start")


@pytest.fixture
def log():
    return []


@pytest.fixture
def recorded_engine(log, clock, frames):
    entities = Entities(
        enemies=[Recorder(log, "enemy1"), Recorder(log, "enemy2")],
        player=Recorder(log, "player"),
    )
    return Engine(
        clock,
        frames,
        board=Recorder(log, "board"),
        entities=entities,
        animations=Recorder(log, "animations"),
        popover=Recorder(log, "popover"),
        container=Container(),
    )


@pytest.fixture
def engine(clock, frames, board, entities, animations, popover, container, board_canvas):
    return Engine(clock, frames, board, entities, animations, popover, container,
                  canvas=board_canvas)


class TestStart:
    """Starting the loop."""

    def test_start_runs_one_frame_and_reschedules(self, engine, frames, clock):
        engine.start()

        assert frames.requests == 1
        assert frames.pending == engine._main
        assert engine.frame_count == 1
        assert engine.last_frame_timestamp == clock.now()

    def test_start_shows_title_and_loads_first_level(self, engine, popover, board, entities):
        engine.start()

        assert popover.state == PopoverState.GAME_START
        assert board.current_level == 1
        assert entities.player is not None

    def test_start_order(self, recorded_engine, log):
        recorded_engine.start()

        assert log[:3] == ["animations.stop_all", "board.reset", "popover.show_game_start"]
        assert "collisions" in log

    def test_each_frame_requests_the_next(self, engine, frames, clock):
        engine.start()
        for _ in range(4):
            clock.advance(16)
            frames.step()

        assert frames.requests == 5
        assert engine.frame_count == 5


class TestFrameTiming:
    """dt computation and clamping."""

    @pytest.fixture
    def dts(self, engine, monkeypatch):
        seen = []
        monkeypatch.setattr(engine, "update", seen.append)
        return seen

    def test_first_frame_has_zero_dt(self, engine, dts):
        engine.start()
        assert dts == [0.0]

    def test_dt_in_seconds(self, engine, dts, clock, frames):
        engine.start()
        clock.advance(16)
        frames.step()
        assert dts[-1] == pytest.approx(0.016)

    def test_long_pause_is_clamped(self, engine, dts, clock, frames):
        engine.start()
        clock.advance(10_000)
        frames.step()
        assert dts[-1] == 0.25

    def test_clock_going_backwards_gives_zero(self, engine, dts, clock, frames):
        engine.start()
        clock.advance(-500)
        frames.step()
        assert dts[-1] == 0.0

    def test_timestamp_follows_clock(self, engine, clock, frames):
        engine.start()
        clock.advance(40)
        frames.step()
        assert engine.last_frame_timestamp == clock.now()

    def test_custom_max_frame_delta(self, clock, frames, board, entities, animations,
                                    popover, container, board_canvas, monkeypatch):
        engine = Engine(clock, frames, board, entities, animations, popover, container,
                        canvas=board_canvas, max_frame_delta=0.05)
        seen = []
        monkeypatch.setattr(engine, "update", seen.append)

        engine.start()
        clock.advance(1000)
        frames.step()
        assert seen[-1] == 0.05


class TestOrdering:
    """Fixed update and render order."""

    def test_update_order(self, recorded_engine, log):
        recorded_engine.update(0.1)

        assert log == [
            "enemy1.update",
            "enemy2.update",
            "player.update",
            "obstacle.update",
            "costumes.update",
            "animations.update",
            "popover.update",
            "collisions",
        ]

    def test_render_order(self, recorded_engine, log):
        recorded_engine.render()

        assert log == [
            "board.render",
            "animations.render",
            "enemy1.render",
            "enemy2.render",
            "player.render",
            "popover.render",
        ]

    def test_missing_player_is_skipped(self, recorded_engine, log, caplog):
        recorded_engine.entities.player = None

        with caplog.at_level(logging.DEBUG, logger="candycorn.engine"):
            recorded_engine.update(0.1)
            recorded_engine.render()

        assert "player.update" not in log
        assert "player.render" not in log
        assert "collisions" in log
        assert "popover.render" in log
        assert "No player" in caplog.text


class TestWithRealComponents:
    """The engine driving the real board, popover and animations."""

    def test_update_and_render_before_any_level(self, engine, entities):
        assert entities.player is None
        engine.update(0.016)
        engine.render()

    def test_canvas_follows_level_size(self, engine, board, board_canvas):
        engine.start()
        assert (board_canvas.width, board_canvas.height) == (505, 606)

        board.load_level(2)
        engine.update(0.0)

        assert (board_canvas.width, board_canvas.height) == (707, 707)
        assert engine.canvas is board_canvas

    def test_creates_and_attaches_canvas(self, clock, frames, board, entities, animations,
                                         popover):
        container = Container()
        engine = Engine(clock, frames, board, entities, animations, popover, container)

        assert engine.canvas in container
        assert (engine.canvas.width, engine.canvas.height) == (505, 606)

    def test_finished_animations_leave_queue(self, engine, animations, board_canvas,
                                             clock, frames, rng):
        engine.start()
        animations.play(SmashAnimation(board_canvas, (50, 50), rng=rng))
        assert animations.count == 1

        for _ in range(10):
            clock.advance(250)
            frames.step()

        assert animations.count == 0

    def test_end_screen_fireworks_advance(self, engine, popover, clock, frames):
        engine.start()
        popover.show_game_end()
        radius = popover.fireworks[1].radius

        clock.advance(100)
        frames.step()

        assert popover.fireworks[1].radius == pytest.approx(radius + 9)

    def test_many_frames_never_fail(self, engine, clock, frames, board):
        engine.start()
        for level in (1, 2, 3):
            board.load_level(level)
            for _ in range(30):
                clock.advance(33)
                frames.step()

        assert engine.frame_count == 91

    def test_canvas_given_is_used(self, clock, frames, board, entities, animations,
                                  popover, container):
        canvas = Canvas.create("custom", 10, 10)
        engine = Engine(clock, frames, board, entities, animations, popover, container,
                        canvas=canvas)
        assert engine.canvas is canvas
        assert canvas in container
