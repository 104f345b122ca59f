"""Markers of no-death (1CC) completions in Arcade and Story modes."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, fields
from enum import Enum
from typing import ClassVar, TypeVar


class Run(Enum):
    """Whether a character finished a mode without dying."""

    COMPLETED = 1
    NOT_COMPLETED = 0

    def is_completed(self) -> bool:
        return self is Run.COMPLETED

    @classmethod
    def from_byte(cls, byte: int) -> Run:
        try:
            return cls(byte)
        except ValueError:
            raise ValueError(f"invalid run byte {byte:#04x}") from None


_R = TypeVar("_R", bound="_Runs")


class _Runs:
    """Shared behaviour of the per-character run markers."""

    N_CHARACTERS: ClassVar[int]
    SIZE: ClassVar[int]

    @classmethod
    def _all_completed(cls: type[_R]) -> _R:
        return cls._build([Run.COMPLETED] * cls.N_CHARACTERS)

    def _runs(self) -> list[Run]:
        return [getattr(self, field.name) for field in fields(self)]  # type: ignore[arg-type]

    @classmethod
    def _build(cls: type[_R], runs: Iterable[Run]) -> _R:
        values = list(runs)
        if len(values) != cls.N_CHARACTERS:
            raise ValueError(
                f"{cls.__name__} needs {cls.N_CHARACTERS} runs, got {len(values)}"
            )
        if not all(isinstance(value, Run) for value in values):
            raise TypeError("all items must be Run values")
        return cls(*values)

    @classmethod
    def _parse(cls: type[_R], data: bytes) -> _R:
        data = bytes(data)
        if len(data) != cls.SIZE:
            raise ValueError(f"{cls.__name__} needs {cls.SIZE} bytes, got {len(data)}")
        return cls._build(Run.from_byte(byte) for byte in data)

    def _serialize(self) -> bytes:
        return bytes(run.value for run in self._runs())


@dataclass
class PerfectStoryMode(_Runs):
    """Story mode 1CCs; Sumika has no Story mode of her own."""

    N_CHARACTERS: ClassVar[int] = 14
    SIZE: ClassVar[int] = 14

    sora: Run = Run.NOT_COMPLETED
    alte: Run = Run.NOT_COMPLETED
    tsih: Run = Run.NOT_COMPLETED
    mira: Run = Run.NOT_COMPLETED
    sham: Run = Run.NOT_COMPLETED
    nath: Run = Run.NOT_COMPLETED
    star_breaker: Run = Run.NOT_COMPLETED
    suguri: Run = Run.NOT_COMPLETED
    saki: Run = Run.NOT_COMPLETED
    iru: Run = Run.NOT_COMPLETED
    nanako: Run = Run.NOT_COMPLETED
    kae: Run = Run.NOT_COMPLETED
    kyoko: Run = Run.NOT_COMPLETED
    hime: Run = Run.NOT_COMPLETED

    @classmethod
    def completed(cls) -> PerfectStoryMode:
        """Every character completed."""
        return cls._all_completed()

    def to_list(self) -> list[Run]:
        """Runs in the order the game stores them."""
        return self._runs()

    @classmethod
    def from_list(cls, runs: Iterable[Run]) -> PerfectStoryMode:
        return cls._build(runs)

    @classmethod
    def from_bytes(cls, data: bytes) -> PerfectStoryMode:
        return cls._parse(data)

    def to_bytes(self) -> bytes:
        return self._serialize()


@dataclass
class PerfectArcadeMode(_Runs):
    """Arcade mode 1CCs, Sumika included."""

    N_CHARACTERS: ClassVar[int] = 15
    SIZE: ClassVar[int] = 15

    sora: Run = Run.NOT_COMPLETED
    alte: Run = Run.NOT_COMPLETED
    tsih: Run = Run.NOT_COMPLETED
    mira: Run = Run.NOT_COMPLETED
    sham: Run = Run.NOT_COMPLETED
    nath: Run = Run.NOT_COMPLETED
    star_breaker: Run = Run.NOT_COMPLETED
    suguri: Run = Run.NOT_COMPLETED
    saki: Run = Run.NOT_COMPLETED
    iru: Run = Run.NOT_COMPLETED
    nanako: Run = Run.NOT_COMPLETED
    kae: Run = Run.NOT_COMPLETED
    kyoko: Run = Run.NOT_COMPLETED
    hime: Run = Run.NOT_COMPLETED
    sumika: Run = Run.NOT_COMPLETED

    @classmethod
    def completed(cls) -> PerfectArcadeMode:
        """Every character completed."""
        return cls._all_completed()

    def to_list(self) -> list[Run]:
        """Runs in the order the game stores them."""
        return self._runs()

    @classmethod
    def from_list(cls, runs: Iterable[Run]) -> PerfectArcadeMode:
        return cls._build(runs)

    @classmethod
    def from_bytes(cls, data: bytes) -> PerfectArcadeMode:
        return cls._parse(data)

    def to_bytes(self) -> bytes:
        return self._serialize()