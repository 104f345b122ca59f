"""Unlock sections and the format version of the online profile file."""

from __future__ import annotations

import struct
from collections.abc import Iterable, Iterator
from enum import Enum
from typing import BinaryIO, ClassVar, TypeVar

VERSION_MAGIC = b"\xa1\x05\x00\x00"
VERSION_DISPLAY = "0xA1_05_00_00"

_U32 = struct.Struct("<I")


def _read_exact(stream: BinaryIO, size: int) -> bytes:
    data = stream.read(size) or b""
    if len(data) != size:
        raise ValueError(f"unexpected end of data: needed {size} bytes, got {len(data)}")
    return data


def read_version(stream: BinaryIO) -> bytes:
    """Read and check the four-byte version marker."""
    data = _read_exact(stream, len(VERSION_MAGIC))
    if data != VERSION_MAGIC:
        raise ValueError(f"unsupported version marker {data.hex()}")
    return data


def version_bytes() -> bytes:
    """The version marker as written to the file."""
    return VERSION_MAGIC


class UnlockStatus(Enum):
    OPEN = 1
    LOCKED = 0

    @classmethod
    def from_byte(cls, byte: int) -> UnlockStatus:
        try:
            return cls(byte)
        except ValueError:
            raise ValueError(f"invalid unlock byte {byte:#04x}") from None


_S = TypeVar("_S", bound="UnlockSection")


class UnlockSection:
    """A length-prefixed list of unlock statuses."""

    DEFAULT_SIZE: ClassVar[int] = 0

    def __init__(self, items: Iterable[UnlockStatus] | None = None) -> None:
        if items is None:
            items = [UnlockStatus.LOCKED] * self.DEFAULT_SIZE
        values = list(items)
        if not all(isinstance(value, UnlockStatus) for value in values):
            raise TypeError("all items must be UnlockStatus values")
        self.items = values

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[UnlockStatus]:
        return iter(self.items)

    def __getitem__(self, index: int) -> UnlockStatus:
        return self.items[index]

    def __eq__(self, other: object) -> bool:
        if type(self) is not type(other):
            return NotImplemented
        return self.items == other.items

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        opened = sum(item is UnlockStatus.OPEN for item in self.items)
        return f"{type(self).__name__}({opened}/{len(self.items)} open)"

    def is_fully_unlocked(self) -> bool:
        return all(item is UnlockStatus.OPEN for item in self.items)

    def unlock_all(self) -> None:
        self.items = [UnlockStatus.OPEN] * len(self.items)

    @classmethod
    def read(cls: type[_S], stream: BinaryIO) -> _S:
        (length,) = _U32.unpack(_read_exact(stream, _U32.size))
        raw = _read_exact(stream, length)
        return cls(UnlockStatus.from_byte(byte) for byte in raw)

    def to_bytes(self) -> bytes:
        if len(self.items) > 0xFFFFFFFF:
            raise ValueError("too many items for a u32 length prefix")
        return _U32.pack(len(self.items)) + bytes(item.value for item in self.items)


class TitlesSection(UnlockSection):
    DEFAULT_SIZE = 0x01_11


class AvatarsSection(UnlockSection):
    DEFAULT_SIZE = 0x1F


class BackgroundsSection(UnlockSection):
    DEFAULT_SIZE = 0x13