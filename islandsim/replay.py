"""Tick-based scheduling of actions and deterministic event record/replay."""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace

from islandsim.events import ActionEvent, ActionId, Event, EventQueue, EventType

log = logging.getLogger(__name__)

DEFAULT_INTERVAL = 180
DEFAULT_RECORD_LIMIT = 1000


class TickScheduler:
    """Builds future-dated actions and fires a periodic interact action."""

    def __init__(self, queue: EventQueue, interval: int = DEFAULT_INTERVAL) -> None:
        if interval <= 0:
            raise ValueError(f"interval must be positive, got {interval}")
        self._queue = queue
        self.interval = interval
        self._last_triggered = 0

    def schedule_delayed_action(self, action: ActionId, delay_ticks: int) -> Event:
        """Return a pressed action event stamped delay_ticks after the current tick."""
        if delay_ticks < 0:
            raise ValueError(f"delay_ticks must not be negative, got {delay_ticks}")
        event = self._queue.make_event(EventType.ACTION)
        event.data = ActionEvent(ActionId(action), pressed=True)
        event.tick = self._queue.current_tick + delay_ticks
        log.info(
            "scheduling action %d to happen at tick %d (current: %d)",
            int(action),
            event.tick,
            self._queue.current_tick,
        )
        return event

    def process_scheduled_events(self) -> Event | None:
        """Push an interact action once on every multiple of the interval."""
        tick = self._queue.current_tick
        if tick > 0 and tick % self.interval == 0 and tick != self._last_triggered:
            event = self._queue.make_event(EventType.ACTION)
            event.data = ActionEvent(ActionId.INTERACT, pressed=True)
            self._queue.push(event)
            self._last_triggered = tick
            log.info("triggered scheduled event at tick %d", tick)
            return event
        return None


@dataclass(frozen=True)
class RecordedEvent:
    event: Event
    recorded_tick: int


class EventRecorder:
    """Records events and replays them later with their original tick spacing."""

    def __init__(self, queue: EventQueue, limit: int = DEFAULT_RECORD_LIMIT) -> None:
        if limit <= 0:
            raise ValueError(f"limit must be positive, got {limit}")
        self._queue = queue
        self.limit = limit
        self._buffer: list[RecordedEvent] = []
        self._index = 0
        self._replaying = False
        self._offset = 0

    @property
    def replaying(self) -> bool:
        return self._replaying

    @property
    def recorded(self) -> tuple[RecordedEvent, ...]:
        return tuple(self._buffer)

    def start_recording(self) -> None:
        """Discard anything recorded so far."""
        self._buffer.clear()
        log.info("started recording events at tick %d", self._queue.current_tick)

    def record(self, event: Event) -> bool:
        """Store a copy of the event; return False once the limit is reached."""
        if len(self._buffer) >= self.limit:
            return False
        self._buffer.append(RecordedEvent(replace(event), event.tick))
        return True

    def start_replay(self) -> None:
        """Begin replaying, anchoring the first recorded event at the current tick."""
        self._index = 0
        self._replaying = True
        first = self._buffer[0].recorded_tick if self._buffer else 0
        self._offset = self._queue.current_tick - first
        log.info(
            "started replaying %d events from tick %d",
            len(self._buffer),
            self._queue.current_tick,
        )

    def replay_events(self) -> list[Event]:
        """Push every recorded event that is due, restamped with the current tick."""
        if not self._replaying or self._index >= len(self._buffer):
            return []
        current = self._queue.current_tick
        replayed: list[Event] = []
        while self._index < len(self._buffer):
            entry = self._buffer[self._index]
            if current < self._offset + entry.recorded_tick:
                break
            event = replace(entry.event, tick=current)
            self._queue.push(event)
            replayed.append(event)
            self._index += 1
            log.info(
                "replayed event at tick %d (original: %d)", current, entry.recorded_tick
            )
        if self._index >= len(self._buffer):
            self._replaying = False
            log.info("replay finished at tick %d", current)
        return replayed