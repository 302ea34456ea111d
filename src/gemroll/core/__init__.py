"""Core framework components for Gemroll."""

from .state import State, StateMachine
from .events import EventBus, Event, EventType
from .driver import FrameDriver

__all__ = ["State", "StateMachine", "EventBus", "Event", "EventType", "FrameDriver"]
