"""Unlockable characters, arenas and music, plus singleplayer win counters."""

from __future__ import annotations

import struct
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import ClassVar


class Status(Enum):
    """Whether an unlockable item is available in game."""

    ENABLED = 1
    DISABLED = 0

    def is_enabled(self) -> bool:
        return self is Status.ENABLED

    def __invert__(self) -> Status:
        return Status.DISABLED if self is Status.ENABLED else Status.ENABLED

    @classmethod
    def from_byte(cls, byte: int) -> Status:
        try:
            return cls(byte)
        except ValueError:
            raise ValueError(f"invalid status byte {byte:#04x}") from None


class MusicTrack(IntEnum):
    NEED_FOR_SPEED = 0
    BLACK_HOLE = 1
    DISTANT_THUNDER = 2
    SWORDFISH = 3
    SHINE = 4
    EXPENDABLES = 5
    RIBBON = 6
    MOVING_OUT = 7
    ACCELERATOR = 8
    REMEMBER_ME = 9
    MGOM = 10

    def __str__(self) -> str:
        return _MUSIC_NAMES[self]


_MUSIC_NAMES = {
    MusicTrack.NEED_FOR_SPEED: "Need for Speed",
    MusicTrack.BLACK_HOLE: "Black Hole",
    MusicTrack.DISTANT_THUNDER: "Distant Thunder",
    MusicTrack.SWORDFISH: "Swordfish",
    MusicTrack.SHINE: "Shine",
    MusicTrack.EXPENDABLES: "Expendables",
    MusicTrack.RIBBON: "Ribbon",
    MusicTrack.MOVING_OUT: "Moving Out",
    MusicTrack.ACCELERATOR: "Accelerator",
    MusicTrack.REMEMBER_ME: "Remember Me",
    MusicTrack.MGOM: "MGOM",
}


class Character(IntEnum):
    """Playable characters, in the order the game stores them."""

    SORA = 0
    ALTE = 1
    TSIH = 2
    MIRA = 3
    SHAM = 4
    NATH = 5
    STAR_BREAKER = 6
    SUGURI = 7
    SAKI = 8
    IRU = 9
    NANAKO = 10
    KAE = 11
    KYOKO = 12
    HIME = 13
    SUMIKA = 14

    def __str__(self) -> str:
        if self is Character.STAR_BREAKER:
            return "Star Breaker"
        return self.name.capitalize()


class Arena(IntEnum):
    BEFORE_THE_WAR = 0
    WAR_10K_YEARS_AGO = 1
    CANYON_OF_WIND = 2
    DUST_STORM = 3
    RAIN_AND_SUNSET = 4
    EQUATOR_DOLDRUMS = 5
    BIG_BRIDGE = 6
    CAPITAL_IN_FLAMES = 7
    WHIRLPOOL_OF_MALICE = 8
    NATURE_10K = 9
    CRASHED_SPACESHIP = 10
    GUARDIANS_CHAMBER = 11
    MOONLIGHT_DANCE_HALL = 12
    SUMIKA_HIDEOUT = 13

    def __str__(self) -> str:
        return _ARENA_NAMES[self]


_ARENA_NAMES = {
    Arena.BEFORE_THE_WAR: "Before the War",
    Arena.WAR_10K_YEARS_AGO: "War 10k years ago",
    Arena.CANYON_OF_WIND: "Canyon of Wind",
    Arena.DUST_STORM: "Dust Storm",
    Arena.RAIN_AND_SUNSET: "Rain and Sunset",
    Arena.EQUATOR_DOLDRUMS: "Equator Doldrums",
    Arena.BIG_BRIDGE: "Big Bridge",
    Arena.CAPITAL_IN_FLAMES: "Capital in Flames",
    Arena.WHIRLPOOL_OF_MALICE: "Whirlpool of Malice",
    Arena.NATURE_10K: "Nature 10k",
    Arena.CRASHED_SPACESHIP: "Crashed Spaceship",
    Arena.GUARDIANS_CHAMBER: "Guardian's Chamber",
    Arena.MOONLIGHT_DANCE_HALL: "Moonlight Dance Hall",
    Arena.SUMIKA_HIDEOUT: "Sumika's Hideout",
}


class _StatusArray:
    """A fixed-length list of statuses addressed by an enum."""

    KEYS: ClassVar[type[IntEnum]]
    AMOUNT: ClassVar[int]
    SIZE: ClassVar[int]
    DISABLED_BY_DEFAULT: ClassVar[frozenset[IntEnum]] = frozenset()

    def __init__(self, statuses: Iterable[Status] | None = None) -> None:
        if statuses is None:
            statuses = (
                Status.DISABLED if key in self.DISABLED_BY_DEFAULT else Status.ENABLED
                for key in self.KEYS
            )
        values = list(statuses)
        if len(values) != self.AMOUNT:
            raise ValueError(
                f"{type(self).__name__} needs {self.AMOUNT} statuses, got {len(values)}"
            )
        if not all(isinstance(value, Status) for value in values):
            raise TypeError("all items must be Status values")
        self._statuses = values

    @classmethod
    def _all_enabled(cls):
        return cls([Status.ENABLED] * cls.AMOUNT)

    def _toggle(self, key: int) -> None:
        self[key] = ~self[key]

    @classmethod
    def _parse_statuses(cls, data: bytes) -> list[Status]:
        data = bytes(data)
        if len(data) != cls.SIZE:
            raise ValueError(f"{cls.__name__} needs {cls.SIZE} bytes, got {len(data)}")
        return [Status.from_byte(byte) for byte in data]

    def _status_bytes(self) -> bytes:
        return bytes(status.value for status in self._statuses)

    def __getitem__(self, key: int) -> Status:
        return self._statuses[self.KEYS(key)]

    def __setitem__(self, key: int, status: Status) -> None:
        if not isinstance(status, Status):
            raise TypeError("status must be a Status value")
        self._statuses[self.KEYS(key)] = status

    def __iter__(self) -> Iterator[Status]:
        return iter(self._statuses)

    def __len__(self) -> int:
        return len(self._statuses)

    def __eq__(self, other: object) -> bool:
        if type(self) is not type(other):
            return NotImplemented
        return self._statuses == other._statuses

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        enabled = [key.name for key in self.KEYS if self[key].is_enabled()]
        return f"{type(self).__name__}(enabled={enabled})"

    def items(self) -> list[tuple[IntEnum, Status]]:
        """Pairs of key and status, in storage order."""
        return list(zip(self.KEYS, self._statuses))

    def copy(self):
        return type(self)(list(self._statuses))


class MusicTracks(_StatusArray):
    """Stock (non-DLC) music; DLC tracks are tracked by Steam, not the savefile."""

    KEYS = MusicTrack
    AMOUNT = 11
    SIZE = 11
    DISABLED_BY_DEFAULT = frozenset(
        {
            MusicTrack.SWORDFISH,
            MusicTrack.ACCELERATOR,
            MusicTrack.REMEMBER_ME,
            MusicTrack.MGOM,
        }
    )

    @classmethod
    def all(cls) -> MusicTracks:
        """Every track enabled."""
        return cls._all_enabled()

    def toggle(self, track: int) -> None:
        self._toggle(track)

    @classmethod
    def from_bytes(cls, data: bytes) -> MusicTracks:
        return cls(cls._parse_statuses(data))

    def to_bytes(self) -> bytes:
        return self._status_bytes()


class PlayableCharacters(_StatusArray):
    KEYS = Character
    AMOUNT = 15
    SIZE = 15
    DISABLED_BY_DEFAULT = frozenset(
        {Character.STAR_BREAKER, Character.HIME, Character.SUMIKA}
    )

    @classmethod
    def all(cls) -> PlayableCharacters:
        """Every character enabled."""
        return cls._all_enabled()

    def toggle(self, character: int) -> None:
        self._toggle(character)

    @classmethod
    def from_bytes(cls, data: bytes) -> PlayableCharacters:
        return cls(cls._parse_statuses(data))

    def to_bytes(self) -> bytes:
        return self._status_bytes()


class Arenas(_StatusArray):
    """Arena backgrounds; the stored form has an unknown byte after the ninth arena."""

    KEYS = Arena
    AMOUNT = 14
    SIZE = 15
    _UNUSED_OFFSET: ClassVar[int] = 9
    DISABLED_BY_DEFAULT = frozenset(
        {
            Arena.CAPITAL_IN_FLAMES,
            Arena.WHIRLPOOL_OF_MALICE,
            Arena.CRASHED_SPACESHIP,
            Arena.GUARDIANS_CHAMBER,
            Arena.MOONLIGHT_DANCE_HALL,
            Arena.SUMIKA_HIDEOUT,
            Arena.EQUATOR_DOLDRUMS,
        }
    )

    def __init__(self, statuses: Iterable[Status] | None = None, unused: int = 0) -> None:
        super().__init__(statuses)
        if not 0 <= unused <= 0xFF:
            raise ValueError(f"unused byte {unused} does not fit in a byte")
        self.unused = unused

    @classmethod
    def all(cls) -> Arenas:
        """Every arena enabled."""
        return cls._all_enabled()

    def toggle(self, arena: int) -> None:
        self._toggle(arena)

    def copy(self) -> Arenas:
        return Arenas(list(self._statuses), self.unused)

    @classmethod
    def from_bytes(cls, data: bytes) -> Arenas:
        data = bytes(data)
        if len(data) != cls.SIZE:
            raise ValueError(f"{cls.__name__} needs {cls.SIZE} bytes, got {len(data)}")
        offset = cls._UNUSED_OFFSET
        statuses = [Status.from_byte(byte) for byte in data[:offset] + data[offset + 1 :]]
        return cls(statuses, data[offset])

    def to_bytes(self) -> bytes:
        raw = self._status_bytes()
        offset = self._UNUSED_OFFSET
        return raw[:offset] + bytes([self.unused]) + raw[offset:]


_WINS_FORMAT = struct.Struct("<5I")


@dataclass
class SingleplayerWins:
    """Counters of singleplayer wins and no-death completions."""

    total: int = 0
    n_arcade_easy_1ccs: int = 0
    n_arcade_medium_1ccs: int = 0
    n_arcade_hard_1ccs: int = 0
    n_story_1ccs: int = 0

    SIZE: ClassVar[int] = _WINS_FORMAT.size

    @classmethod
    def from_bytes(cls, data: bytes) -> SingleplayerWins:
        data = bytes(data)
        if len(data) != cls.SIZE:
            raise ValueError(f"{cls.__name__} needs {cls.SIZE} bytes, got {len(data)}")
        return cls(*_WINS_FORMAT.unpack(data))

    def to_bytes(self) -> bytes:
        try:
            return _WINS_FORMAT.pack(
                self.total,
                self.n_arcade_easy_1ccs,
                self.n_arcade_medium_1ccs,
                self.n_arcade_hard_1ccs,
                self.n_story_1ccs,
            )
        except struct.error as error:
            raise ValueError(f"win counter out of range: {error}") from error