"""Show a simple byte-level difference between two files in the saves folder."""

from __future__ import annotations

import argparse
import os
import sys
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from aos2save.env import AoS2Env, EnvError

_BYTE_ROW = "| {:<16} | {:<16} | {:<16}"
_SIZE_ROW = "| {:<16} | {:>16} |"


def hexy(value: int) -> str:
    """A number in decimal and hexadecimal: ``"26 / 0x1a"``."""
    return f"{value} / {value:#x}"


@dataclass(frozen=True)
class ByteDifference:
    position: int
    previous: int
    current: int


@dataclass(frozen=True)
class SizeDifference:
    previous: int
    current: int

    def __str__(self) -> str:
        return f"{hexy(self.previous)} vs {hexy(self.current)}\n"


def format_byte_table(diffs: Iterable[ByteDifference]) -> str:
    """A table of changed bytes; empty when there are none."""
    diffs = list(diffs)
    if not diffs:
        return ""
    lines = [_BYTE_ROW.format("Position", "Before", "After")]
    lines.extend(
        _BYTE_ROW.format(hexy(diff.position), hexy(diff.previous), hexy(diff.current))
        for diff in diffs
    )
    return "".join(f"{line}\n" for line in lines)


def format_size_table(size_diff: SizeDifference) -> str:
    lines = [
        "Size difference",
        _SIZE_ROW.format("Previous", "Current"),
        _SIZE_ROW.format(hexy(size_diff.previous), hexy(size_diff.current)),
    ]
    return "".join(f"{line}\n" for line in lines)


def _byte_differences(previous: bytes, current: bytes) -> Iterator[ByteDifference]:
    for position, (before, after) in enumerate(zip(previous, current)):
        if before != after:
            yield ByteDifference(position, before, after)


class DifferenceKind(Enum):
    IDENTICAL = "identical"
    SAME_SIZE_ONLY_BYTES = "same_size_only_bytes"
    SIZE_INNER_DIFF = "size_inner_diff"
    SIZE_OUTER_DIFF = "size_outer_diff"


@dataclass(frozen=True)
class FileDifference:
    """How two files differ.

    For files of different sizes only the first changed byte within the
    overlapping part is kept.
    """

    kind: DifferenceKind
    byte_diffs: tuple[ByteDifference, ...] = ()
    size_diff: SizeDifference | None = None

    @classmethod
    def between(cls, previous: bytes, current: bytes) -> FileDifference:
        previous = bytes(previous)
        current = bytes(current)
        if len(previous) == len(current):
            diffs = tuple(_byte_differences(previous, current))
            if not diffs:
                return cls(DifferenceKind.IDENTICAL)
            return cls(DifferenceKind.SAME_SIZE_ONLY_BYTES, byte_diffs=diffs)

        size_diff = SizeDifference(len(previous), len(current))
        first = next(_byte_differences(previous, current), None)
        if first is None:
            return cls(DifferenceKind.SIZE_OUTER_DIFF, size_diff=size_diff)
        return cls(
            DifferenceKind.SIZE_INNER_DIFF, byte_diffs=(first,), size_diff=size_diff
        )

    def __str__(self) -> str:
        if self.kind is DifferenceKind.IDENTICAL:
            return "Identical files\n"
        if self.kind is DifferenceKind.SAME_SIZE_ONLY_BYTES:
            return "Same file size but different contents:\n" + format_byte_table(
                self.byte_diffs
            )
        assert self.size_diff is not None
        size_table = format_size_table(self.size_diff)
        if self.kind is DifferenceKind.SIZE_INNER_DIFF:
            return (
                size_table
                + "\n"
                + "First change in overlapping bytes:\n"
                + format_byte_table(self.byte_diffs)
            )
        return size_table


def canonical_save_path(
    saves: str | os.PathLike[str], file_name: str | os.PathLike[str]
) -> Path:
    """Join a file name onto the saves folder and resolve it; it must exist."""
    joined = Path(saves) / file_name
    try:
        return joined.resolve(strict=True)
    except OSError as error:
        raise OSError(f"Failed to canonicalize path: {joined}") from error


def load_binary(path: str | os.PathLike[str]) -> bytes:
    try:
        with open(path, "rb") as file:
            return file.read()
    except OSError as error:
        raise OSError(f"Failed to open file: {path}") from error


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="easydiff",
        description="Looks for files in AoS2 saves folder and shows a simple difference.",
    )
    parser.add_argument(
        "before", metavar="ORIGINAL", type=Path, help="The original (unchanged) file."
    )
    parser.add_argument(
        "after", metavar="MODIFIED", type=Path, help="The other (modified) file."
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    try:
        env = AoS2Env.from_env()
    except EnvError as error:
        print(f"Error: {error}", file=sys.stderr)
        return 1
    args = _parse_args(argv)

    try:
        before_path = canonical_save_path(env.saves_folder, args.before)
        after_path = canonical_save_path(env.saves_folder, args.after)
        before = load_binary(before_path)
        after = load_binary(after_path)
    except OSError as error:
        print(f"Error: {error}", file=sys.stderr)
        return 1

    print(f"Working with files:\nBefore: {before_path}\nAfter: {after_path}\n")
    print(FileDifference.between(before, after))
    return 0


if __name__ == "__main__":
    sys.exit(main())