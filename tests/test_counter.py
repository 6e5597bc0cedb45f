import pytest

from tuikit.counter import BasicCounterApp, CounterError, GuardedCounterApp
from tuikit.keys import Key, KeyEvent


RIGHT = KeyEvent(Key.RIGHT)
LEFT = KeyEvent(Key.LEFT)
QUIT = KeyEvent("q")


@pytest.mark.parametrize("cls", [BasicCounterApp, GuardedCounterApp])
def test_handle_key_event(cls):
    app = cls()
    app.handle_key_event(RIGHT)
    assert app.counter == 1

    app.handle_key_event(LEFT)
    assert app.counter == 0

    app = cls()
    app.handle_key_event(QUIT)
    assert app.exit is True


@pytest.mark.parametrize("cls", [BasicCounterApp, GuardedCounterApp])
def test_handle_key_event_panic(cls):
    app = cls()
    with pytest.raises(OverflowError, match="attempt to subtract with overflow"):
        app.handle_key_event(LEFT)


def test_handle_key_event_overflow():
    app = GuardedCounterApp()
    app.handle_key_event(RIGHT)
    app.handle_key_event(RIGHT)
    assert app.counter == 2
    with pytest.raises(CounterError) as info:
        app.handle_key_event(RIGHT)
    assert str(info.value) == "counter overflow"


def test_basic_counter_overflows_past_byte_range():
    app = BasicCounterApp(counter=255)
    with pytest.raises(OverflowError, match="attempt to add with overflow"):
        app.increment_counter()
    assert app.counter == 255


def test_basic_counter_counts_freely_within_range():
    app = BasicCounterApp()
    for _ in range(10):
        app.handle_key_event(RIGHT)
    assert app.counter == 10
    assert app.exit is False


def test_other_keys_are_ignored():
    app = GuardedCounterApp()
    app.handle_key_event(KeyEvent("x"))
    app.handle_key_event(KeyEvent(Key.UP))
    assert app.counter == 0
    assert app.exit is False