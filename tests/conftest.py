"""Shared fixtures: a hand-driven clock and frame requester, and real
game components wired against an empty assets directory."""

import random

import pytest

from candycorn.animation.queue import AnimationQueue
from candycorn.board.manager import BoardManager
from candycorn.core.events import EventBus
from candycorn.entities.base import TILE_SIZE, Entities
from candycorn.graphics.renderer import Canvas, Container
from candycorn.popover.manager import PopoverManager
from candycorn.resources import Resources


class FakeClock:
    """Clock whose time only moves when a test says so."""

    def __init__(self, ms: float = 1000.0):
        self.ms = ms

    def now(self) -> float:
        return self.ms

    def advance(self, ms: float) -> None:
        self.ms += ms


class FakeFrames:
    """Frame requester that holds the callback until ``step`` is called."""

    def __init__(self):
        self.pending = None
        self.requests = 0

    def request_frame(self, callback) -> None:
        self.pending = callback
        self.requests += 1

    def step(self) -> None:
        callback, self.pending = self.pending, None
        callback()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def frames():
    return FakeFrames()


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def event_bus():
    return EventBus()


@pytest.fixture
def resources(tmp_path):
    """Resources over an empty directory; every image is a placeholder."""
    return Resources(tmp_path)


@pytest.fixture
def board_canvas():
    return Canvas.create("board", 5 * TILE_SIZE, 6 * TILE_SIZE)


@pytest.fixture
def container(board_canvas):
    container = Container()
    container.attach(board_canvas)
    return container


@pytest.fixture
def entities():
    return Entities()


@pytest.fixture
def animations():
    return AnimationQueue()


@pytest.fixture
def board(board_canvas, resources, entities, animations, event_bus, rng):
    return BoardManager(board_canvas, resources, entities, animations, event_bus, rng=rng)


@pytest.fixture
def popover(container, resources, board_canvas, clock, rng, event_bus):
    return PopoverManager(container, resources, board_canvas, clock, rng=rng, event_bus=event_bus)
