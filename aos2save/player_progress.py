"""The player progress file, ``game.sys``."""

from __future__ import annotations

import os
import struct
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import ClassVar

from aos2save.env import AoS2Env
from aos2save.runs import PerfectArcadeMode, PerfectStoryMode
from aos2save.unlockables import (
    Arenas,
    MusicTracks,
    PlayableCharacters,
    SingleplayerWins,
)
from aos2save.xor_encoding import decode_body, encode_body

_TOTAL_SIZE = 172
_HEADER_SIZE = 8
_BODY_LENGTH = 164
_BODY_LENGTH_OFFSET = 0x04
_VERSION_OFFSET = 0x08
_U32 = struct.Struct("<I")

# Offsets of known sections within the decoded file.
_SECTIONS = (
    (0x0F, "playable_characters", PlayableCharacters),
    (0x24, "arenas", Arenas),
    (0x3E, "music_tracks", MusicTracks),
    (0x4C, "wins", SingleplayerWins),
    (0x63, "arcade_easy_1ccs", PerfectArcadeMode),
    (0x76, "arcade_medium_1ccs", PerfectArcadeMode),
    (0x89, "arcade_hard_1ccs", PerfectArcadeMode),
    (0x9C, "story_1ccs", PerfectStoryMode),
)


def _unknown_offsets() -> tuple[int, ...]:
    covered = set(range(_BODY_LENGTH_OFFSET, _BODY_LENGTH_OFFSET + _U32.size))
    covered.update(range(_VERSION_OFFSET, _VERSION_OFFSET + _U32.size))
    for offset, _name, section in _SECTIONS:
        covered.update(range(offset, offset + section.SIZE))
    return tuple(index for index in range(_TOTAL_SIZE) if index not in covered)


_UNKNOWN_OFFSETS = _unknown_offsets()


class ProgressError(Exception):
    """Raised when the progress file cannot be read or written."""

    class Kind(Enum):
        FILE_READ = "Failed to open file for reading"
        FILE_WRITE = "Failed to open file for writing"
        WRITE_PERMISSION = "No permission to write to a file"
        NOT_FOUND = "File does not exist"
        ENCODED_WRITE = "Failed to write a raw encoded stream"
        ENCODED_READ = "Failed to read a raw encoded stream (invalid file format)"
        DECODED_WRITE = "Failed to write intermediate decoded stream"
        DECODED_READ = "Failed to read intermediate decoded stream (invalid file format)"

    def __init__(self, kind: ProgressError.Kind) -> None:
        super().__init__(kind.value)
        self.kind = kind


@dataclass
class PlayerProgress:
    """Unlockables, 1CC markers and win counters from ``game.sys``.

    Bytes whose purpose is unknown are kept in ``unknown`` so that
    a file survives a read/write cycle unchanged.
    """

    FILE_NAME: ClassVar[str] = "game.sys"
    TOTAL_SIZE: ClassVar[int] = _TOTAL_SIZE
    HEADER_SIZE: ClassVar[int] = _HEADER_SIZE
    BODY_SIZE: ClassVar[int] = _TOTAL_SIZE - _HEADER_SIZE
    ENCODING_START_KEY: ClassVar[int] = 0x4A
    UNKNOWN_SIZE: ClassVar[int] = len(_UNKNOWN_OFFSETS)

    playable_characters: PlayableCharacters = field(default_factory=PlayableCharacters)
    arenas: Arenas = field(default_factory=Arenas)
    music_tracks: MusicTracks = field(default_factory=MusicTracks)
    wins: SingleplayerWins = field(default_factory=SingleplayerWins)
    arcade_easy_1ccs: PerfectArcadeMode = field(default_factory=PerfectArcadeMode)
    arcade_medium_1ccs: PerfectArcadeMode = field(default_factory=PerfectArcadeMode)
    arcade_hard_1ccs: PerfectArcadeMode = field(default_factory=PerfectArcadeMode)
    story_1ccs: PerfectStoryMode = field(default_factory=PerfectStoryMode)
    version: int = 0
    unknown: bytes = field(default=bytes(len(_UNKNOWN_OFFSETS)), repr=False)

    def __post_init__(self) -> None:
        self.unknown = bytes(self.unknown)
        if len(self.unknown) != self.UNKNOWN_SIZE:
            raise ValueError(
                f"unknown bytes must be {self.UNKNOWN_SIZE} long, got {len(self.unknown)}"
            )

    @classmethod
    def from_decoded(cls, data: bytes) -> PlayerProgress:
        """Parse the decoded (plain) form of the file."""
        data = bytes(data)
        if len(data) != _TOTAL_SIZE:
            raise ProgressError(ProgressError.Kind.DECODED_READ)
        (body_length,) = _U32.unpack_from(data, _BODY_LENGTH_OFFSET)
        if body_length != _BODY_LENGTH:
            raise ProgressError(ProgressError.Kind.DECODED_READ)
        (version,) = _U32.unpack_from(data, _VERSION_OFFSET)
        try:
            sections = {
                name: section.from_bytes(data[offset : offset + section.SIZE])
                for offset, name, section in _SECTIONS
            }
        except ValueError as error:
            raise ProgressError(ProgressError.Kind.DECODED_READ) from error
        unknown = bytes(data[index] for index in _UNKNOWN_OFFSETS)
        return cls(version=version, unknown=unknown, **sections)

    def to_decoded(self) -> bytes:
        """Serialize into the decoded (plain) form of the file."""
        buffer = bytearray(_TOTAL_SIZE)
        for index, byte in zip(_UNKNOWN_OFFSETS, self.unknown):
            buffer[index] = byte
        try:
            _U32.pack_into(buffer, _BODY_LENGTH_OFFSET, _BODY_LENGTH)
            _U32.pack_into(buffer, _VERSION_OFFSET, self.version)
            for offset, name, section in _SECTIONS:
                raw = getattr(self, name).to_bytes()
                if len(raw) != section.SIZE:
                    raise ValueError(f"section {name} has a wrong size")
                buffer[offset : offset + section.SIZE] = raw
        except (struct.error, ValueError) as error:
            raise ProgressError(ProgressError.Kind.DECODED_WRITE) from error
        return bytes(buffer)

    @classmethod
    def decode(cls, data: bytes) -> PlayerProgress:
        """Parse the encoded file contents; bytes past the file size are ignored."""
        data = bytes(data)
        if len(data) < _TOTAL_SIZE:
            raise ProgressError(ProgressError.Kind.ENCODED_READ)
        header = data[:_HEADER_SIZE]
        body = decode_body(data[_HEADER_SIZE:_TOTAL_SIZE], cls.ENCODING_START_KEY)
        return cls.from_decoded(header + body)

    def encode(self) -> bytes:
        """Serialize into the encoded form stored on disk."""
        decoded = self.to_decoded()
        body = encode_body(decoded[_HEADER_SIZE:], self.ENCODING_START_KEY)
        return decoded[:_HEADER_SIZE] + body

    @classmethod
    def from_file(cls, path: str | os.PathLike[str]) -> PlayerProgress:
        try:
            with open(path, "rb") as file:
                data = file.read()
        except FileNotFoundError as error:
            raise ProgressError(ProgressError.Kind.NOT_FOUND) from error
        except OSError as error:
            raise ProgressError(ProgressError.Kind.FILE_READ) from error
        return cls.decode(data)

    def save_to_file(self, path: str | os.PathLike[str]) -> None:
        """Overwrite an existing file; a missing file is not created."""
        data = self.encode()
        flags = os.O_WRONLY | os.O_TRUNC | getattr(os, "O_BINARY", 0)
        try:
            descriptor = os.open(path, flags)
        except FileNotFoundError as error:
            raise ProgressError(ProgressError.Kind.NOT_FOUND) from error
        except PermissionError as error:
            raise ProgressError(ProgressError.Kind.WRITE_PERMISSION) from error
        except OSError as error:
            raise ProgressError(ProgressError.Kind.FILE_WRITE) from error
        try:
            with os.fdopen(descriptor, "wb") as file:
                file.write(data)
        except OSError as error:
            raise ProgressError(ProgressError.Kind.ENCODED_WRITE) from error

    @classmethod
    def load(cls, env: AoS2Env) -> PlayerProgress:
        return cls.from_file(Path(env.saves_folder) / cls.FILE_NAME)

    def save(self, env: AoS2Env) -> None:
        self.save_to_file(Path(env.saves_folder) / self.FILE_NAME)