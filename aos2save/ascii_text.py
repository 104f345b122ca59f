"""Length-limited ASCII strings stored in the online profile file."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from enum import Enum
from typing import BinaryIO, ClassVar, TypeVar

_U32 = struct.Struct("<I")


class AsciiTextError(ValueError):
    """Raised when a text does not satisfy its length or ASCII constraints."""

    class Kind(Enum):
        LENGTH = "length"
        ASCII = "ascii"
        ENCODING = "encoding"

    def __init__(self, kind: AsciiTextError.Kind, message: str) -> None:
        super().__init__(message)
        self.kind = kind


def _read_exact(stream: BinaryIO, size: int) -> bytes:
    data = stream.read(size) or b""
    if len(data) != size:
        raise ValueError(f"unexpected end of data: needed {size} bytes, got {len(data)}")
    return data


_T = TypeVar("_T", bound="AsciiText")


@dataclass(frozen=True, order=True)
class AsciiText:
    """An ASCII string whose byte length lies within ``MIN_LENGTH..=MAX_LENGTH``.

    Stored as a little-endian u32 length followed by the characters.
    """

    MIN_LENGTH: ClassVar[int] = 0
    MAX_LENGTH: ClassVar[int] = 255
    DEFAULT: ClassVar[str] = ""

    text: str

    def __init_subclass__(cls, **kwargs: object) -> None:
        super().__init_subclass__(**kwargs)
        if not cls.MIN_LENGTH < cls.MAX_LENGTH:
            raise TypeError(f"{cls.__name__}: MIN_LENGTH must be below MAX_LENGTH")

    def __post_init__(self) -> None:
        if not isinstance(self.text, str):
            raise TypeError("text must be a str")
        length = len(self.text.encode("utf-8", "surrogatepass"))
        if not self.MIN_LENGTH <= length <= self.MAX_LENGTH:
            raise AsciiTextError(
                AsciiTextError.Kind.LENGTH,
                f"Length must be {self.MIN_LENGTH}-{self.MAX_LENGTH} characters",
            )
        if not self.text.isascii():
            raise AsciiTextError(
                AsciiTextError.Kind.ASCII, "Non-ASCII characters are not allowed"
            )

    def __str__(self) -> str:
        return self.text

    @classmethod
    def read(cls: type[_T], stream: BinaryIO) -> _T:
        """Read a length-prefixed text from a binary stream."""
        (length,) = _U32.unpack(_read_exact(stream, _U32.size))
        raw = _read_exact(stream, length)
        try:
            text = raw.decode("utf-8")
        except UnicodeDecodeError as error:
            raise AsciiTextError(AsciiTextError.Kind.ENCODING, "Bad encoding") from error
        return cls(text)

    def to_bytes(self) -> bytes:
        raw = self.text.encode("ascii")
        return _U32.pack(len(raw)) + raw

    @classmethod
    def default(cls: type[_T]) -> _T:
        return cls(cls.DEFAULT)


class Nickname(AsciiText):
    MIN_LENGTH = 1
    MAX_LENGTH = 16
    DEFAULT = "Suguri"


class LobbyName(AsciiText):
    MIN_LENGTH = 0
    MAX_LENGTH = 24
    DEFAULT = "Suguri"


class LobbyPassword(AsciiText):
    MIN_LENGTH = 0
    MAX_LENGTH = 24
    DEFAULT = ""