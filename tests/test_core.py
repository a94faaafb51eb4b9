"""
Core Tests

Tests for the event bus and the popover state machine.

Run with: pytest tests/test_core.py -v
"""

import asyncio

import pytest

from candycorn.core.events import Event, EventBus, EventType, button_press_event, move_event
from candycorn.core.state import PopoverState, StateMachine


class TestEventBus:
    """Pub/sub behaviour."""

    def test_subscribe_and_emit(self, event_bus):
        received = []
        event_bus.subscribe(EventType.BUTTON_PRESS, received.append)

        event = button_press_event()
        event_bus.emit(event)

        assert received == [event]

    def test_only_matching_type(self, event_bus):
        received = []
        event_bus.subscribe(EventType.RESTART, received.append)

        event_bus.emit(button_press_event())

        assert received == []

    def test_unsubscribe(self, event_bus):
        received = []
        unsubscribe = event_bus.subscribe(EventType.BUTTON_PRESS, received.append)
        unsubscribe()

        event_bus.emit(button_press_event())

        assert received == []

    def test_failing_handler_does_not_stop_others(self, event_bus):
        received = []

        def broken(event):
            raise RuntimeError("boom")

        event_bus.subscribe(EventType.BUTTON_PRESS, broken)
        event_bus.subscribe(EventType.BUTTON_PRESS, received.append)

        event_bus.emit(button_press_event())

        assert len(received) == 1

    def test_queued_events_processed(self):
        bus = EventBus()
        received = []

        async def on_move(event):
            received.append(event.data["direction"])

        bus.subscribe(EventType.MOVE_UP, on_move)
        bus.subscribe(EventType.MOVE_DOWN, lambda e: received.append(e.data["direction"]))

        async def run():
            bus.queue_event(move_event("up"))
            bus.queue_event(move_event("down"))
            await bus.process_queue()

        asyncio.run(run())

        assert received == ["up", "down"]

    def test_history(self, event_bus):
        event_bus.emit(move_event("up"))
        event_bus.emit(button_press_event())
        event_bus.emit(move_event("down"))

        moves = event_bus.get_history(EventType.MOVE_UP)
        assert len(moves) == 1
        assert len(event_bus.get_history(limit=2)) == 2

    def test_move_event_types(self):
        assert move_event("left").type == EventType.MOVE_LEFT
        assert move_event("right").type == EventType.MOVE_RIGHT
        assert move_event("up").type == EventType.MOVE_UP
        assert move_event("down").type == EventType.MOVE_DOWN

        with pytest.raises(KeyError):
            move_event("sideways")

    def test_string_event_types(self, event_bus):
        received = []
        event_bus.subscribe("custom", received.append)
        event_bus.emit(Event("custom", data={"n": 1}))
        assert received[0].data == {"n": 1}


class TestStateMachine:
    """Popover state transitions."""

    def test_initial_state(self):
        assert StateMachine().state == PopoverState.NONE

    @pytest.mark.parametrize("state", [
        PopoverState.GAME_START,
        PopoverState.COSTUME_REVEAL,
        PopoverState.GAME_END,
    ])
    def test_show_and_hide(self, state):
        machine = StateMachine()
        assert machine.transition(state)
        assert machine.state == state
        assert machine.transition(PopoverState.NONE)
        assert machine.state == PopoverState.NONE

    def test_direct_swap_is_not_a_transition(self):
        machine = StateMachine(PopoverState.GAME_START)
        assert not machine.can_transition(PopoverState.GAME_END)
        assert not machine.transition(PopoverState.GAME_END)
        assert machine.state == PopoverState.GAME_START

    def test_replace(self):
        machine = StateMachine(PopoverState.GAME_START)
        changes = []
        machine.add_listener(lambda old, new: changes.append((old, new)))

        machine.replace(PopoverState.COSTUME_REVEAL)

        assert machine.state == PopoverState.COSTUME_REVEAL
        assert changes == [(PopoverState.GAME_START, PopoverState.COSTUME_REVEAL)]

    def test_replace_from_none_is_a_transition(self):
        machine = StateMachine()
        machine.replace(PopoverState.GAME_END)
        assert machine.state == PopoverState.GAME_END

    def test_listeners(self):
        machine = StateMachine()
        changes = []

        def listener(old, new):
            changes.append((old, new))

        machine.add_listener(listener)
        machine.transition(PopoverState.GAME_START)
        machine.transition(PopoverState.NONE)

        assert changes == [
            (PopoverState.NONE, PopoverState.GAME_START),
            (PopoverState.GAME_START, PopoverState.NONE),
        ]

    def test_failing_listener_is_logged(self):
        machine = StateMachine()

        def broken(old, new):
            raise ValueError("boom")

        machine.add_listener(broken)
        assert machine.transition(PopoverState.GAME_START)
        assert machine.state == PopoverState.GAME_START
