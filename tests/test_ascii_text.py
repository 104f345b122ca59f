import io

import pytest

from aos2save.ascii_text import (
    AsciiText,
    AsciiTextError,
    LobbyName,
    LobbyPassword,
    Nickname,
)


class FourTo8(AsciiText):
    MIN_LENGTH = 4
    MAX_LENGTH = 8


NICKNAME_PAIRS = [
    pytest.param(b"\x01\x00\x00\x00W", "W", id="shortest"),
    pytest.param(b"\x10\x00\x00\x00Crazy Boii XDDDD", "Crazy Boii XDDDD", id="longest"),
]


def test_zero_length_decoding():
    actual = LobbyPassword.read(io.BytesIO(b"\x00\x00\x00\x00"))
    assert actual == LobbyPassword("")


def test_zero_length_encoding():
    assert LobbyPassword("").to_bytes() == b"\x00\x00\x00\x00"


@pytest.mark.parametrize("raw, text", NICKNAME_PAIRS)
def test_ok_decoding(raw, text):
    actual = Nickname.read(io.BytesIO(raw))
    assert actual == Nickname(text)


@pytest.mark.parametrize("raw, text", NICKNAME_PAIRS)
def test_ok_encoding(raw, text):
    assert Nickname(text).to_bytes() == raw


@pytest.mark.parametrize(
    "raw",
    [
        pytest.param(b"\x01\x00\x00\x00L", id="too_short"),
        pytest.param(b"\x10\x00\x00\x001234567890123456", id="too_long"),
    ],
)
def test_bad_decoding(raw):
    # The same bytes are fine for wider bounds, so only the 4-8 limit rejects them.
    assert Nickname.read(io.BytesIO(raw)).to_bytes() == raw
    with pytest.raises(AsciiTextError) as info:
        FourTo8.read(io.BytesIO(raw))
    assert info.value.kind is AsciiTextError.Kind.LENGTH


def test_length_error_message():
    with pytest.raises(AsciiTextError, match="Length must be 1-16 characters"):
        Nickname("")


def test_non_ascii_rejected():
    with pytest.raises(AsciiTextError) as info:
        Nickname("Sugurí")
    assert info.value.kind is AsciiTextError.Kind.ASCII


def test_bad_encoding_rejected():
    with pytest.raises(AsciiTextError) as info:
        LobbyName.read(io.BytesIO(b"\x02\x00\x00\x00\xff\xfe"))
    assert info.value.kind is AsciiTextError.Kind.ENCODING


def test_truncated_stream_rejected():
    with pytest.raises(ValueError):
        LobbyName.read(io.BytesIO(b"\x05\x00\x00\x00ab"))


def test_defaults():
    assert Nickname.default().text == "Suguri"
    assert LobbyName.default().text == "Suguri"
    assert LobbyPassword.default().text == ""


def test_round_trip_and_str():
    name = LobbyName("DOC lobby")
    assert LobbyName.read(io.BytesIO(name.to_bytes())) == name
    assert str(name) == "DOC lobby"


def test_ordering_and_equality():
    assert Nickname("abc") < Nickname("abd")
    assert Nickname("abc") == Nickname("abc")


def test_invalid_bounds_rejected():
    with pytest.raises(TypeError):

        class Broken(AsciiText):
            MIN_LENGTH = 8
            MAX_LENGTH = 4

    assert Nickname("a" * 16).text == "a" * 16
    with pytest.raises(AsciiTextError):
        Nickname("a" * 17)