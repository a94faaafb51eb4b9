"""Core framework components for CANDYCORN."""

from .state import PopoverState, StateMachine
from .events import EventBus, Event, EventType
from .clock import Clock, FrameRequester, SystemClock

__all__ = [
    "PopoverState",
    "StateMachine",
    "EventBus",
    "Event",
    "EventType",
    "Clock",
    "FrameRequester",
    "SystemClock",
]
