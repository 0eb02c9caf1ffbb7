"""Tick-stamped input events and a bounded FIFO queue that drops the oldest on overflow."""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass, replace
from enum import IntEnum
from typing import Union

log = logging.getLogger(__name__)

DEFAULT_CAPACITY = 256


class EventType(IntEnum):
    NONE = 0
    QUIT = 1
    WINDOW_RESIZED = 2
    KEY_DOWN = 3
    KEY_UP = 4
    MOUSE_DOWN = 5
    MOUSE_UP = 6
    MOUSE_MOVE = 7
    MOUSE_WHEEL = 8
    ACTION = 9


class ActionId(IntEnum):
    NONE = 0
    JUMP = 1
    INTERACT = 2


@dataclass(frozen=True)
class KeyEvent:
    key: int
    repeat: bool = False
    alt: bool = False
    ctrl: bool = False
    shift: bool = False


@dataclass(frozen=True)
class MouseButtonEvent:
    button: int
    x: int = 0
    y: int = 0


@dataclass(frozen=True)
class MouseMoveEvent:
    x: int = 0
    y: int = 0
    dx: int = 0
    dy: int = 0


@dataclass(frozen=True)
class MouseWheelEvent:
    x: float = 0.0
    y: float = 0.0


@dataclass(frozen=True)
class WindowResizeEvent:
    width: int
    height: int


@dataclass(frozen=True)
class ActionEvent:
    id: ActionId
    pressed: bool = False


Payload = Union[
    KeyEvent,
    MouseButtonEvent,
    MouseMoveEvent,
    MouseWheelEvent,
    WindowResizeEvent,
    ActionEvent,
]


@dataclass
class Event:
    """An event of a given type, stamped with the tick it was generated on."""

    type: EventType = EventType.NONE
    tick: int = 0
    data: Payload | None = None


class EventQueue:
    """A bounded FIFO of events that also keeps the simulation's tick counter."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity <= 0 or capacity & (capacity - 1):
            raise ValueError(f"capacity must be a positive power of two, got {capacity}")
        self._capacity = capacity
        self._events: deque[Event] = deque(maxlen=capacity)
        self.dropped = 0
        self.current_tick = 0

    @property
    def capacity(self) -> int:
        return self._capacity

    def reset(self) -> None:
        """Empty the queue and zero the drop count and the tick counter."""
        self._events.clear()
        self.dropped = 0
        self.current_tick = 0

    def push(self, event: Event) -> None:
        """Append a copy of the event, dropping the oldest one when full."""
        if len(self._events) >= self._capacity:
            if self.dropped < 1:
                log.warning("event queue overflow, dropping oldest")
            self.dropped += 1
        self._events.append(replace(event))

    def poll(self) -> Event | None:
        """Remove and return the oldest event, or None when empty."""
        return self._events.popleft() if self._events else None

    def flush(self) -> None:
        """Discard every pending event."""
        self._events.clear()

    def __len__(self) -> int:
        return len(self._events)

    def __iter__(self) -> Iterator[Event]:
        """Drain the queue, yielding events oldest first."""
        while self._events:
            yield self._events.popleft()

    def increment_tick(self) -> None:
        self.current_tick += 1

    def make_event(self, event_type: EventType) -> Event:
        """Create an event of the given type stamped with the current tick."""
        return Event(type=EventType(event_type), tick=self.current_tick)