"""Location of the game's saves folder."""

from __future__ import annotations

import os
import sys
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

_WINDOWS_TAIL = ("Documents", "Fruitbat Factory", "AoS2")

_LINUX_TAIL = (
    ".local",
    "share",
    "Steam",
    "steamapps",
    "compatdata",
    "390710",
    "pfx",
    "drive_c",
    "users",
    "steamuser",
    "Documents",
    "Fruitbat Factory",
    "AoS2",
)


class EnvError(Exception):
    """Raised when the saves folder cannot be derived from the environment."""

    def __init__(self, message: str = "Home directory is not defined") -> None:
        super().__init__(message)


@dataclass(frozen=True)
class AoS2Env:
    """Where the game keeps its save files."""

    saves_folder: Path

    def __post_init__(self) -> None:
        object.__setattr__(self, "saves_folder", Path(self.saves_folder))

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> AoS2Env:
        """Derive the saves folder from the ``HOME`` environment variable."""
        env = os.environ if environ is None else environ
        home = env.get("HOME")
        if home is None:
            raise EnvError()
        tail = _WINDOWS_TAIL if sys.platform.startswith("win") else _LINUX_TAIL
        return cls(Path(home).joinpath(*tail))

    @classmethod
    def from_path(cls, path: str | os.PathLike[str]) -> AoS2Env:
        """Use an explicitly given saves folder."""
        return cls(Path(path))