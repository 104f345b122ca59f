import pytest

from aos2save.event import Event, Key


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("123456789aBcDeF", "123456789aBcDeF"),
        ("1234567890" * 4, "12345678901234567890123456789012"),
    ],
)
def test_ascii_input_buffer_outputs(text, expected):
    step = 0.2
    assert step <= Event.MAX_TEXT_AGE
    start = 1000.0
    current = Event.empty(start)
    for index, character in enumerate(text):
        current = current.follow_with(character, start + index * step)
    assert current.accumulated_input == expected


@pytest.mark.parametrize(
    ("initial", "key", "age", "expected"),
    [
        ("doesnt matter", "s", 5.0, "s"),
        ("remains", Key.ENTER, 0.01, "remains"),
    ],
)
def test_ascii_input_buffer_resets(initial, key, age, expected):
    now = 1000.0
    event = Event(key=None, accumulated_input=initial, received_at=now - age)
    event = event.follow_with(key, now)
    assert event.accumulated_input == expected


def test_key_code_is_kept():
    event = Event.empty(0.0).follow_with(Key.PAGE_DOWN, 0.1)
    assert event.key is Key.PAGE_DOWN
    assert event.received_at == 0.1


def test_non_key_input_has_no_key_and_keeps_text():
    event = Event.empty(0.0).follow_with("a", 0.1).follow_with(None, 0.2)
    assert event.key is None
    assert event.accumulated_input == "a"


def test_non_ascii_character_is_not_buffered():
    event = Event.empty(0.0).follow_with("é", 0.1)
    assert event.key == "é"
    assert event.accumulated_input == ""


def test_multi_character_key_is_rejected():
    with pytest.raises(ValueError):
        Event.empty(0.0).follow_with("ab", 0.1)