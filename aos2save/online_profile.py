"""The player online profile file, ``player.rkg``."""

from __future__ import annotations

import io
import os
import struct
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import BinaryIO, ClassVar

from aos2save.ascii_text import LobbyName, LobbyPassword, Nickname
from aos2save.avatar import AvatarBackground, AvatarCharacter
from aos2save.env import AoS2Env
from aos2save.title import TitleCharacter, TitleColor, TitleText, read_u32_enum
from aos2save.unlocks import (
    AvatarsSection,
    BackgroundsSection,
    TitlesSection,
    read_version,
    version_bytes,
)

_U32 = struct.Struct("<I")


class Visibility(Enum):
    """Whether a piece of profile information is shown."""

    SHOW = 1
    HIDE = 0

    @classmethod
    def default(cls) -> Visibility:
        return cls.HIDE

    @classmethod
    def read(cls, stream: BinaryIO) -> Visibility:
        data = stream.read(1) or b""
        if len(data) != 1:
            raise ValueError("unexpected end of data while reading visibility")
        try:
            return cls(data[0])
        except ValueError:
            raise ValueError(f"invalid visibility byte {data[0]:#04x}") from None

    def to_bytes(self) -> bytes:
        return bytes([self.value])


class ProfileError(Exception):
    """Raised when the online profile file cannot be read or written."""

    class Kind(Enum):
        FILE_READ = "Failed to open file for reading"
        FILE_WRITE = "Failed to open file for writing"
        WRITE_PERMISSION = "No permission to write to a file"
        NOT_FOUND = "File does not exist"
        BIN_WRITE = "Failed to write binary stream (couldn't write into a proper format)"
        BIN_READ = "Failed to read binary stream (invalid file format)"

    def __init__(self, kind: ProfileError.Kind) -> None:
        super().__init__(kind.value)
        self.kind = kind


@dataclass
class PlayerOnlineProfile:
    """Avatars, titles, lobby settings and unlocks of the online profile."""

    FILE_NAME: ClassVar[str] = "player.rkg"

    country: Visibility = Visibility.HIDE
    nickname: Nickname = field(default_factory=Nickname.default)
    lobby_name: LobbyName = field(default_factory=LobbyName.default)
    lobby_password: LobbyPassword = field(default_factory=LobbyPassword.default)
    avatar_character: AvatarCharacter = AvatarCharacter.SUGURI
    avatar_background: AvatarBackground = AvatarBackground.LIGHT_BLUE
    unlockable_avatars: AvatarsSection = field(default_factory=AvatarsSection)
    unlockable_backgrounds: BackgroundsSection = field(default_factory=BackgroundsSection)
    title_character_in_background: TitleCharacter = TitleCharacter.NONE
    title_text_id: TitleText = TitleText.NONE
    titles: TitlesSection = field(default_factory=TitlesSection)
    ingame_title: Visibility = Visibility.HIDE
    hitstun_meter: Visibility = Visibility.HIDE
    spectators: Visibility = Visibility.HIDE
    title_color: TitleColor = TitleColor.YELLOW

    @classmethod
    def read(cls, stream: BinaryIO) -> PlayerOnlineProfile:
        """Read a profile from a binary stream."""
        try:
            read_version(stream)
            return cls(
                country=Visibility.read(stream),
                nickname=Nickname.read(stream),
                lobby_name=LobbyName.read(stream),
                lobby_password=LobbyPassword.read(stream),
                avatar_character=read_u32_enum(AvatarCharacter, stream),
                avatar_background=read_u32_enum(AvatarBackground, stream),
                unlockable_avatars=AvatarsSection.read(stream),
                unlockable_backgrounds=BackgroundsSection.read(stream),
                title_character_in_background=read_u32_enum(TitleCharacter, stream),
                title_text_id=read_u32_enum(TitleText, stream),
                titles=TitlesSection.read(stream),
                ingame_title=Visibility.read(stream),
                hitstun_meter=Visibility.read(stream),
                spectators=Visibility.read(stream),
                title_color=read_u32_enum(TitleColor, stream),
            )
        except (ValueError, struct.error) as error:
            raise ProfileError(ProfileError.Kind.BIN_READ) from error

    @classmethod
    def from_bytes(cls, data: bytes) -> PlayerOnlineProfile:
        return cls.read(io.BytesIO(bytes(data)))

    def to_bytes(self) -> bytes:
        try:
            parts = [
                version_bytes(),
                self.country.to_bytes(),
                self.nickname.to_bytes(),
                self.lobby_name.to_bytes(),
                self.lobby_password.to_bytes(),
                _U32.pack(int(self.avatar_character)),
                _U32.pack(int(self.avatar_background)),
                self.unlockable_avatars.to_bytes(),
                self.unlockable_backgrounds.to_bytes(),
                _U32.pack(int(self.title_character_in_background)),
                _U32.pack(int(self.title_text_id)),
                self.titles.to_bytes(),
                self.ingame_title.to_bytes(),
                self.hitstun_meter.to_bytes(),
                self.spectators.to_bytes(),
                _U32.pack(int(self.title_color)),
            ]
        except (ValueError, struct.error, AttributeError) as error:
            raise ProfileError(ProfileError.Kind.BIN_WRITE) from error
        return b"".join(parts)

    @classmethod
    def from_file(cls, path: str | os.PathLike[str]) -> PlayerOnlineProfile:
        try:
            with open(path, "rb") as file:
                data = file.read()
        except FileNotFoundError as error:
            raise ProfileError(ProfileError.Kind.NOT_FOUND) from error
        except OSError as error:
            raise ProfileError(ProfileError.Kind.FILE_READ) from error
        return cls.from_bytes(data)

    def save_to_file(self, path: str | os.PathLike[str]) -> None:
        """Overwrite an existing file; a missing file is not created."""
        data = self.to_bytes()
        flags = os.O_WRONLY | os.O_TRUNC | getattr(os, "O_BINARY", 0)
        try:
            descriptor = os.open(path, flags)
        except FileNotFoundError as error:
            raise ProfileError(ProfileError.Kind.NOT_FOUND) from error
        except PermissionError as error:
            raise ProfileError(ProfileError.Kind.WRITE_PERMISSION) from error
        except OSError as error:
            raise ProfileError(ProfileError.Kind.FILE_WRITE) from error
        try:
            with os.fdopen(descriptor, "wb") as file:
                file.write(data)
        except OSError as error:
            raise ProfileError(ProfileError.Kind.BIN_WRITE) from error

    @classmethod
    def load(cls, env: AoS2Env) -> PlayerOnlineProfile:
        return cls.from_file(Path(env.saves_folder) / cls.FILE_NAME)

    def save(self, env: AoS2Env) -> None:
        self.save_to_file(Path(env.saves_folder) / self.FILE_NAME)