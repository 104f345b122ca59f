"""Byte encoding used for the body of the progress file.

Each byte is nibble-swapped and xored with a key. Keys form a sequence
that increments in nibble-swapped form: 0xDA, 0xEA, 0xFA, 0x0B, 0x1B...
"""

from __future__ import annotations

from collections.abc import Iterable


def _check_byte(value: int) -> int:
    if not 0 <= value <= 0xFF:
        raise ValueError(f"value {value} does not fit in a byte")
    return value


def swap_nibbles(byte: int) -> int:
    """Swap the high and low four bits of a byte: 0x8A becomes 0xA8."""
    _check_byte(byte)
    return ((byte << 4) | (byte >> 4)) & 0xFF


def encode_byte(raw: int, key: int) -> int:
    """Encode one raw byte with the given key."""
    return swap_nibbles(raw) ^ _check_byte(key)


def decode_byte(encoded: int, key: int) -> int:
    """Decode one encoded byte with the given key."""
    return swap_nibbles(_check_byte(encoded) ^ _check_byte(key))


def key_add(key: int, rhs: int) -> int:
    """Advance a key by ``rhs`` steps, wrapping around at 256."""
    normal = swap_nibbles(key)
    return swap_nibbles((normal + rhs) % 256)


def encode_body(data: Iterable[int], start_key: int) -> bytes:
    """Encode a sequence of raw bytes, keying byte ``i`` with ``start_key + i``."""
    return bytes(
        encode_byte(byte, key_add(start_key, index)) for index, byte in enumerate(data)
    )


def decode_body(data: Iterable[int], start_key: int) -> bytes:
    """Decode a sequence of encoded bytes, keying byte ``i`` with ``start_key + i``."""
    return bytes(
        decode_byte(byte, key_add(start_key, index)) for index, byte in enumerate(data)
    )