import pytest

from tuikit.keys import Key, KeyEvent
from tuikit.stopwatch import AppState, Message, Stopwatch, format_duration


class FakeClock:
    def __init__(self, now=0.0):
        self.now = now

    def __call__(self):
        return self.now


@pytest.fixture
def clock():
    return FakeClock(100.0)


@pytest.fixture
def watch(clock):
    return Stopwatch(clock=clock)


def test_format_duration_documented_examples():
    assert format_duration(0.693) == "00:00.693"
    assert format_duration(1.413) == "00:01.413"


def test_format_duration_zero():
    assert format_duration(0) == "00:00.000"


def test_format_duration_negative_raises():
    with pytest.raises(ValueError):
        format_duration(-1.0)


@pytest.mark.parametrize(
    "event, expected",
    [
        (KeyEvent("q"), Message.QUIT),
        (KeyEvent(" "), Message.START_OR_SPLIT),
        (KeyEvent("s"), Message.STOP),
        (KeyEvent(Key.ENTER), Message.STOP),
        (KeyEvent("x"), Message.TICK),
        (KeyEvent(Key.LEFT), Message.TICK),
        (None, Message.TICK),
    ],
)
def test_handle_event(watch, event, expected):
    assert watch.handle_event(event) is expected


def test_starts_stopped_with_no_elapsed_time(watch):
    assert watch.state is AppState.STOPPED
    assert watch.elapsed() == 0.0


def test_start_records_first_split(watch, clock):
    watch.start_or_split()
    assert watch.state is AppState.RUNNING
    assert watch.splits == [clock.now]


def test_split_while_running_adds_split(watch, clock):
    watch.start_or_split()
    clock.now += 2.0
    watch.start_or_split()
    assert len(watch.splits) == 2
    assert watch.state is AppState.RUNNING


def test_elapsed_while_running_follows_clock(watch, clock):
    watch.start_or_split()
    clock.now += 3.0
    assert watch.elapsed() == pytest.approx(3.0)


def test_stop_freezes_elapsed(watch, clock):
    watch.start_or_split()
    clock.now += 5.0
    watch.stop()
    assert watch.state is AppState.STOPPED
    clock.now += 10.0
    assert watch.elapsed() == pytest.approx(5.0)


def test_stop_when_stopped_records_nothing(watch):
    watch.stop()
    assert watch.splits == []
    assert watch.state is AppState.STOPPED


def test_restart_clears_previous_splits(watch, clock):
    watch.start_or_split()
    clock.now += 1.0
    watch.stop()
    clock.now += 1.0
    watch.start_or_split()
    assert watch.splits == [clock.now]


def test_quit_via_update(watch):
    watch.update(Message.QUIT)
    assert watch.state is AppState.QUITTING


def test_update_dispatches_start_and_stop(watch, clock):
    watch.update(Message.START_OR_SPLIT)
    assert watch.state is AppState.RUNNING
    clock.now += 2.0
    watch.update(Message.STOP)
    assert watch.state is AppState.STOPPED
    assert watch.elapsed() == pytest.approx(2.0)


def test_tick_counts_frames_before_a_second(watch, clock):
    watch.tick()
    clock.now += 0.5
    watch.tick()
    assert watch.frames == 2
    assert watch.fps == 0.0


def test_tick_computes_fps_after_a_second(watch, clock):
    for _ in range(3):
        watch.tick()
    clock.now += 2.0
    watch.update(Message.TICK)
    assert watch.fps == pytest.approx(4 / 2.0)
    assert watch.frames == 0
    assert watch.start_time == clock.now


def test_split_lines_empty_without_pairs(watch):
    assert watch.split_lines() == []
    watch.start_or_split()
    assert watch.split_lines() == []


def test_split_lines_newest_first(watch, clock):
    watch.start_or_split()
    clock.now += 1.0
    watch.start_or_split()
    clock.now += 1.0
    watch.start_or_split()
    lines = watch.split_lines()
    assert len(lines) == 2
    assert lines[0].startswith("#02 -- ")
    assert lines[1].startswith("#01 -- ")


def test_first_split_line_split_equals_total(watch, clock):
    watch.start_or_split()
    clock.now += 0.5
    watch.start_or_split()
    (line,) = watch.split_lines()
    _, split, total = line.split(" -- ")
    assert split == total
    assert split == format_duration(0.5)