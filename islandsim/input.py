"""Turning a snapshot of keyboard, mouse and window state into queued events."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

from islandsim.events import (
    ActionEvent,
    ActionId,
    Event,
    EventQueue,
    EventType,
    KeyEvent,
    MouseButtonEvent,
    MouseMoveEvent,
    MouseWheelEvent,
    WindowResizeEvent,
)


class Key(IntEnum):
    SPACE = 32
    APOSTROPHE = 39
    COMMA = 44
    MINUS = 45
    PERIOD = 46
    SLASH = 47
    ZERO = 48
    ONE = 49
    TWO = 50
    THREE = 51
    FOUR = 52
    FIVE = 53
    SIX = 54
    SEVEN = 55
    EIGHT = 56
    NINE = 57
    SEMICOLON = 59
    EQUAL = 61
    A = 65
    B = 66
    C = 67
    D = 68
    E = 69
    F = 70
    G = 71
    H = 72
    I = 73  # noqa: E741
    J = 74
    K = 75
    ESCAPE = 256
    LEFT_SHIFT = 340
    LEFT_CONTROL = 341
    LEFT_ALT = 342
    RIGHT_SHIFT = 344
    RIGHT_CONTROL = 345
    RIGHT_ALT = 346


class MouseButton(IntEnum):
    LEFT = 0
    RIGHT = 1
    MIDDLE = 2


@dataclass(frozen=True)
class InputState:
    """What the keyboard, mouse and window look like on one tick."""

    keys_pressed: frozenset[int] = field(default_factory=frozenset)
    keys_released: frozenset[int] = field(default_factory=frozenset)
    keys_down: frozenset[int] = field(default_factory=frozenset)
    keys_repeated: frozenset[int] = field(default_factory=frozenset)
    buttons_pressed: frozenset[int] = field(default_factory=frozenset)
    buttons_released: frozenset[int] = field(default_factory=frozenset)
    mouse_x: float = 0.0
    mouse_y: float = 0.0
    wheel_x: float = 0.0
    wheel_y: float = 0.0
    screen_width: int = 0
    screen_height: int = 0


class InputCollector:
    """Compares successive input snapshots and pushes the resulting events."""

    def __init__(self, queue: EventQueue) -> None:
        self._queue = queue
        self._last_mouse = (0, 0)
        self._last_size = (0, 0)

    def collect(self, state: InputState) -> list[Event]:
        """Push the events for this snapshot and return them in push order."""
        tick = self._queue.current_tick
        events: list[Event] = []

        def emit(event_type: EventType, data) -> None:
            event = Event(type=event_type, tick=tick, data=data)
            self._queue.push(event)
            events.append(event)

        down = state.keys_down
        alt = Key.LEFT_ALT in down or Key.RIGHT_ALT in down
        ctrl = Key.LEFT_CONTROL in down or Key.RIGHT_CONTROL in down
        shift = Key.LEFT_SHIFT in down or Key.RIGHT_SHIFT in down

        for key in range(Key.SPACE, Key.K + 1):
            if key in state.keys_pressed:
                repeat = key in state.keys_repeated
                emit(EventType.KEY_DOWN, KeyEvent(key, repeat, alt, ctrl, shift))
            if key in state.keys_released:
                emit(EventType.KEY_UP, KeyEvent(key, False, alt, ctrl, shift))

        if Key.ESCAPE in state.keys_pressed:
            emit(EventType.QUIT, None)

        x, y = int(state.mouse_x), int(state.mouse_y)
        for button in MouseButton:
            if button in state.buttons_pressed:
                emit(EventType.MOUSE_DOWN, MouseButtonEvent(int(button), x, y))
            if button in state.buttons_released:
                emit(EventType.MOUSE_UP, MouseButtonEvent(int(button), x, y))

        dx, dy = x - self._last_mouse[0], y - self._last_mouse[1]
        if dx or dy:
            emit(EventType.MOUSE_MOVE, MouseMoveEvent(x, y, dx, dy))
            self._last_mouse = (x, y)

        if state.wheel_x != 0 or state.wheel_y != 0:
            emit(EventType.MOUSE_WHEEL, MouseWheelEvent(state.wheel_x, state.wheel_y))

        size = (state.screen_width, state.screen_height)
        if size != self._last_size:
            if self._last_size[0] != 0:
                emit(EventType.WINDOW_RESIZED, WindowResizeEvent(*size))
            self._last_size = size

        if Key.SPACE in state.keys_pressed:
            emit(EventType.ACTION, ActionEvent(ActionId.JUMP, pressed=True))
        if Key.SPACE in state.keys_released:
            emit(EventType.ACTION, ActionEvent(ActionId.JUMP, pressed=False))

        return events