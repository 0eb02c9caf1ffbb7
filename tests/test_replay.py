import pytest

from islandsim.events import ActionEvent, ActionId, Event, EventQueue, EventType, KeyEvent
from islandsim.replay import EventRecorder, TickScheduler


def test_schedule_delayed_action_stamps_future_tick():
    q = EventQueue()
    q.current_tick = 10
    event = TickScheduler(q).schedule_delayed_action(ActionId.JUMP, 5)
    assert event.tick == 15
    assert event.data == ActionEvent(ActionId.JUMP, pressed=True)
    assert len(q) == 0


def test_schedule_rejects_negative_delay():
    with pytest.raises(ValueError):
        TickScheduler(EventQueue()).schedule_delayed_action(ActionId.JUMP, -1)


def test_interval_must_be_positive():
    with pytest.raises(ValueError):
        TickScheduler(EventQueue(), 0)


def test_no_trigger_at_tick_zero():
    q = EventQueue()
    assert TickScheduler(q).process_scheduled_events() is None
    assert len(q) == 0


def test_triggers_once_per_interval_multiple():
    q = EventQueue()
    scheduler = TickScheduler(q)
    q.current_tick = 180
    fired = scheduler.process_scheduled_events()
    assert fired.data == ActionEvent(ActionId.INTERACT, pressed=True)
    assert scheduler.process_scheduled_events() is None
    q.current_tick = 181
    assert scheduler.process_scheduled_events() is None
    q.current_tick = 360
    assert scheduler.process_scheduled_events() is not None
    assert [e.tick for e in q] == [180, 360]


def test_record_respects_limit():
    recorder = EventRecorder(EventQueue(), limit=2)
    results = [recorder.record(Event(EventType.QUIT, t)) for t in range(3)]
    assert results == [True, True, False]
    assert len(recorder.recorded) == 2


def test_start_recording_clears_buffer():
    recorder = EventRecorder(EventQueue())
    recorder.record(Event(EventType.QUIT, 1))
    recorder.start_recording()
    assert recorder.recorded == ()


def test_replay_without_start_does_nothing():
    q = EventQueue()
    recorder = EventRecorder(q)
    recorder.record(Event(EventType.QUIT, 0))
    assert recorder.replay_events() == []
    assert len(q) == 0


def test_replay_preserves_spacing_and_restamps_ticks():
    q = EventQueue()
    recorder = EventRecorder(q)
    recorder.record(Event(EventType.KEY_DOWN, 5, KeyEvent(key=65)))
    recorder.record(Event(EventType.KEY_UP, 8, KeyEvent(key=65)))

    q.current_tick = 100
    recorder.start_replay()
    first = recorder.replay_events()
    assert [e.type for e in first] == [EventType.KEY_DOWN]
    assert first[0].tick == q.current_tick
    assert recorder.replaying

    q.current_tick = 102
    assert recorder.replay_events() == []

    q.current_tick = 103
    second = recorder.replay_events()
    assert [e.type for e in second] == [EventType.KEY_UP]
    assert not recorder.replaying

    pushed = list(q)
    assert [e.data for e in pushed] == [KeyEvent(key=65), KeyEvent(key=65)]


def test_recorded_events_are_copies():
    recorder = EventRecorder(EventQueue())
    event = Event(EventType.QUIT, 3)
    recorder.record(event)
    event.tick = 50
    assert recorder.recorded[0].event.tick == 3
    assert recorder.recorded[0].recorded_tick == 3