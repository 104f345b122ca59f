import pytest

from aos2save.xor_encoding import (
    decode_body,
    decode_byte,
    encode_body,
    encode_byte,
    key_add,
    swap_nibbles,
)

MAPPING = [
    (0xE8, 0x00, 0x8E),
    (0, 0x8E, 0x8E),
    (1, 0x9E, 0x8E),
    (2, 0xAE, 0x8E),
    (3, 0xBE, 0x8E),
    (4, 0xCE, 0x8E),
    (5, 0xDE, 0x8E),
    (6, 0xEE, 0x8E),
    (7, 0xFE, 0x8E),
    (8, 0x0E, 0x8E),
    (9, 0x1E, 0x8E),
    (10, 0x2E, 0x8E),
    (11, 0x3E, 0x8E),
    (12, 0x4E, 0x8E),
    (13, 0x5E, 0x8E),
    (14, 0x6E, 0x8E),
    (15, 0x7E, 0x8E),
    (16, 0x8F, 0x8E),
    (17, 0x9F, 0x8E),
    (18, 0xAF, 0x8E),
    (19, 0xBF, 0x8E),
    (20, 0xCF, 0x8E),
    (21, 0xDF, 0x8E),
    (22, 0xEF, 0x8E),
    (23, 0xFF, 0x8E),
    (24, 0x0F, 0x8E),
    (25, 0x1F, 0x8E),
    (26, 0x2F, 0x8E),
    (27, 0x3F, 0x8E),
    (28, 0x4F, 0x8E),
    (29, 0x5F, 0x8E),
    (30, 0x6F, 0x8E),
    (31, 0x7F, 0x8E),
    (32, 0x8C, 0x8E),
    (48, 0x8D, 0x8E),
    (64, 0x8A, 0x8E),
    (80, 0x8B, 0x8E),
    (96, 0x88, 0x8E),
    (112, 0x89, 0x8E),
    (128, 0x86, 0x8E),
    (144, 0x87, 0x8E),
    (160, 0x84, 0x8E),
    (176, 0x85, 0x8E),
    (192, 0x82, 0x8E),
    (208, 0x83, 0x8E),
    (224, 0x80, 0x8E),
    (240, 0x81, 0x8E),
    (0 >> 8, 0x9E, 0x9E),
    (256 >> 8, 0x8E, 0x9E),
    (512 >> 8, 0xBE, 0x9E),
    (768 >> 8, 0xAE, 0x9E),
    (1024 >> 8, 0xDE, 0x9E),
    (1280 >> 8, 0xCE, 0x9E),
    (1536 >> 8, 0xFE, 0x9E),
    (1792 >> 8, 0xEE, 0x9E),
    (2048 >> 8, 0x1E, 0x9E),
    (2304 >> 8, 0x0E, 0x9E),
]


@pytest.mark.parametrize(
    "value, expected", [(0x8A, 0xA8), (0x00, 0x00), (0x12, 0x21)]
)
def test_nibbles_swap_properly(value, expected):
    assert swap_nibbles(value) == expected


@pytest.mark.parametrize("raw, encoded, key", MAPPING)
def test_decodes(raw, encoded, key):
    assert decode_byte(encoded, key) == raw


@pytest.mark.parametrize("raw, encoded, key", MAPPING)
def test_encodes(raw, encoded, key):
    assert encode_byte(raw, key) == encoded


@pytest.mark.parametrize(
    "key, to_add, expected", [(0x8A, 1, 0x9A), (0x9A, 1, 0xAA), (0xFA, 1, 0x0B)]
)
def test_adds(key, to_add, expected):
    assert key_add(key, to_add) == expected


def test_key_add_wraps_around_full_cycle():
    assert key_add(0x4A, 256) == 0x4A
    assert key_add(0x4A, 257) == key_add(0x4A, 1)


def test_key_add_zero_is_identity():
    assert key_add(0x8E, 0) == 0x8E


def test_body_round_trip():
    data = bytes(range(256)) * 2
    encoded = encode_body(data, 0x4A)
    assert len(encoded) == len(data)
    assert decode_body(encoded, 0x4A) == data


def test_body_uses_advancing_keys():
    encoded = encode_body(bytes([0, 0]), 0x8A)
    assert encoded[0] == encode_byte(0, 0x8A)
    assert encoded[1] == encode_byte(0, 0x9A)


def test_empty_body():
    assert encode_body(b"", 0x4A) == b""
    assert decode_body(b"", 0x4A) == b""


@pytest.mark.parametrize("bad", [-1, 256])
def test_out_of_range_byte_rejected(bad):
    with pytest.raises(ValueError):
        swap_nibbles(bad)
    with pytest.raises(ValueError):
        encode_byte(bad, 0x10)
    with pytest.raises(ValueError):
        decode_byte(0x10, bad)