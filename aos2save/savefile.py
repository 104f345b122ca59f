"""Loaded save files with change tracking and typed accessors."""

from __future__ import annotations

import copy
import os
import threading
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

from aos2save.env import AoS2Env, EnvError
from aos2save.online_profile import PlayerOnlineProfile, ProfileError
from aos2save.player_progress import PlayerProgress, ProgressError
from aos2save.runs import PerfectArcadeMode, PerfectStoryMode
from aos2save.unlockables import SingleplayerWins

T = TypeVar("T")
V = TypeVar("V")


class Channel(Generic[T]):
    """A shared value that remembers whether it changed since it was last taken."""

    def __init__(self, value: T) -> None:
        self._value = value
        self._version = 0
        self._seen_version = 0
        self._lock = threading.Lock()

    def has_changed(self) -> bool:
        with self._lock:
            return self._version != self._seen_version

    def get(self) -> T:
        return self._value

    def modify(self, func: Callable[[T], None]) -> None:
        """Change the value in place and mark it as changed."""
        with self._lock:
            func(self._value)
            self._version += 1

    def take(self) -> T:
        """Return the value and mark the current state as seen."""
        with self._lock:
            self._seen_version = self._version
            return self._value


class Modify(Generic[T, V]):
    """Reads and replaces one attribute of a value held in a channel."""

    def __init__(self, channel: Channel[T], attribute: str) -> None:
        self._channel = channel
        self._attribute = attribute

    def get(self) -> V:
        return copy.deepcopy(getattr(self._channel.get(), self._attribute))

    def send(self, value: V) -> None:
        self._channel.modify(lambda target: setattr(target, self._attribute, value))


class Read(Generic[T, V]):
    """Read-only view derived from a value held in a channel."""

    def __init__(self, channel: Channel[T], getter: Callable[[T], V]) -> None:
        self._channel = channel
        self._getter = getter

    def get(self) -> V:
        return copy.deepcopy(self._getter(self._channel.get()))


@dataclass
class CompletionStats:
    arcade_easy: PerfectArcadeMode
    arcade_medium: PerfectArcadeMode
    arcade_hard: PerfectArcadeMode
    story_any: PerfectStoryMode


class SavefileError(Exception):
    """Raised when the saves folder or one of its files cannot be used."""

    class Kind(Enum):
        ENV = "env"
        PROGRESS = "progress"
        PROFILE = "profile"

    def __init__(self, source: EnvError | ProgressError | ProfileError) -> None:
        if isinstance(source, EnvError):
            kind = SavefileError.Kind.ENV
            message = str(source)
        elif isinstance(source, ProgressError):
            kind = SavefileError.Kind.PROGRESS
            message = f"Failed to open `{PlayerProgress.FILE_NAME}`:\n- {source}\n"
        elif isinstance(source, ProfileError):
            kind = SavefileError.Kind.PROFILE
            message = f"Failed to open `{PlayerOnlineProfile.FILE_NAME}`:\n- {source}\n"
        else:
            raise TypeError(f"unsupported error source: {type(source).__name__}")
        super().__init__(message)
        self.kind = kind
        self.source = source


class ProfileStore:
    """The online profile with change tracking."""

    def __init__(self, profile: PlayerOnlineProfile) -> None:
        self._channel = Channel(profile)

    @classmethod
    def load(cls, env: AoS2Env) -> ProfileStore:
        try:
            return cls(PlayerOnlineProfile.load(env))
        except ProfileError as error:
            raise SavefileError(error) from error

    def save(self, env: AoS2Env) -> None:
        """Write the profile only if it changed since the last save."""
        if not self._channel.has_changed():
            return
        try:
            self._channel.take().save(env)
        except ProfileError as error:
            raise SavefileError(error) from error

    def _modify(self, attribute: str) -> Modify:
        return Modify(self._channel, attribute)

    def modify_title_character(self) -> Modify:
        return self._modify("title_character_in_background")

    def modify_title_color(self) -> Modify:
        return self._modify("title_color")

    def modify_title_text(self) -> Modify:
        return self._modify("title_text_id")

    def modify_avatar_character(self) -> Modify:
        return self._modify("avatar_character")

    def modify_avatar_background(self) -> Modify:
        return self._modify("avatar_background")


def _completion_stats(progress: PlayerProgress) -> CompletionStats:
    return CompletionStats(
        arcade_easy=progress.arcade_easy_1ccs,
        arcade_medium=progress.arcade_medium_1ccs,
        arcade_hard=progress.arcade_hard_1ccs,
        story_any=progress.story_1ccs,
    )


class ProgressStore:
    """The player progress with change tracking."""

    def __init__(self, progress: PlayerProgress) -> None:
        self._channel = Channel(progress)

    @classmethod
    def load(cls, env: AoS2Env) -> ProgressStore:
        try:
            return cls(PlayerProgress.load(env))
        except ProgressError as error:
            raise SavefileError(error) from error

    def save(self, env: AoS2Env) -> None:
        """Write the progress only if it changed since the last save."""
        if not self._channel.has_changed():
            return
        try:
            self._channel.take().save(env)
        except ProgressError as error:
            raise SavefileError(error) from error

    def read_completion_stats(self) -> Read[PlayerProgress, CompletionStats]:
        return Read(self._channel, _completion_stats)

    def read_wins(self) -> Read[PlayerProgress, SingleplayerWins]:
        return Read(self._channel, lambda progress: progress.wins)

    def modify_playable_characters(self) -> Modify:
        return Modify(self._channel, "playable_characters")

    def modify_arenas(self) -> Modify:
        return Modify(self._channel, "arenas")

    def modify_music_tracks(self) -> Modify:
        return Modify(self._channel, "music_tracks")


class Savefile:
    """Both save files of one saves folder."""

    def __init__(
        self, env: AoS2Env, progress: ProgressStore, profile: ProfileStore
    ) -> None:
        self.env = env
        self.progress = progress
        self.profile = profile

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Savefile:
        try:
            env = AoS2Env.from_env(environ)
        except EnvError as error:
            raise SavefileError(error) from error
        return cls.load(env)

    @classmethod
    def from_path(cls, path: str | os.PathLike[str]) -> Savefile:
        return cls.load(AoS2Env.from_path(path))

    @classmethod
    def load(cls, env: AoS2Env) -> Savefile:
        progress = ProgressStore.load(env)
        profile = ProfileStore.load(env)
        return cls(env, progress, profile)

    def save_all(self) -> None:
        """Write whatever changed since the last save."""
        self.progress.save(self.env)
        self.profile.save(self.env)