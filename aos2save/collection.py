"""Cursor and selection helpers for scrolling lists."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence, Sized
from dataclasses import dataclass, replace
from typing import Generic, TypeVar

T = TypeVar("T")

_ASCII_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"
)


def _clamped(index: int, n_items: int) -> int | None:
    """Clamp an index into a collection of ``n_items``; ``None`` if it is empty."""
    if n_items <= 0:
        return None
    return min(max(index, 0), n_items - 1)


@dataclass(frozen=True)
class HoveringIndex:
    """A cursor over a collection that never leaves its bounds."""

    n_items: int
    current: int | None = None

    @classmethod
    def for_items(cls, items: Sized) -> HoveringIndex:
        return cls(len(items))

    @property
    def index(self) -> int | None:
        return self.current

    def with_current(self, current: int) -> HoveringIndex:
        return replace(self, current=_clamped(current, self.n_items))

    def _moved(self, step: int) -> HoveringIndex:
        if self.current is None:
            return self
        return replace(self, current=_clamped(self.current + step, self.n_items))

    def next(self) -> HoveringIndex:
        return self._moved(1)

    def previous(self) -> HoveringIndex:
        return self._moved(-1)

    def first(self) -> HoveringIndex:
        return replace(self, current=_clamped(0, self.n_items))

    def last(self) -> HoveringIndex:
        return replace(self, current=_clamped(max(self.n_items - 1, 0), self.n_items))


@dataclass(frozen=True)
class RadioButtonIndex:
    """A hovered and a selected position within a collection."""

    n_items: int
    hovered: int | None = None
    selected: int | None = None

    @classmethod
    def for_items(cls, items: Sized) -> RadioButtonIndex:
        return cls(len(items))

    def with_hovered(self, index: int) -> RadioButtonIndex:
        return replace(self, hovered=_clamped(index, self.n_items))

    def with_selected(self, index: int) -> RadioButtonIndex:
        return replace(self, selected=_clamped(index, self.n_items))

    def select_hovered(self) -> RadioButtonIndex:
        return replace(self, selected=self.hovered)

    def _hover_moved(self, step: int) -> RadioButtonIndex:
        if self.hovered is None:
            return self
        return replace(self, hovered=_clamped(self.hovered + step, self.n_items))

    def hover_next(self) -> RadioButtonIndex:
        return self._hover_moved(1)

    def hover_previous(self) -> RadioButtonIndex:
        return self._hover_moved(-1)

    def hover_first(self) -> RadioButtonIndex:
        return replace(self, hovered=_clamped(0, self.n_items))

    def hover_last(self) -> RadioButtonIndex:
        return replace(self, hovered=_clamped(max(self.n_items - 1, 0), self.n_items))


class SelectableArray(Generic[T]):
    """A non-empty list with one current item."""

    def __init__(self, items: Iterable[T]) -> None:
        self._items = list(items)
        if not self._items:
            raise ValueError("an empty collection is not allowed")
        self._current_index = 0

    @property
    def current_index(self) -> int:
        return self._current_index

    @property
    def max_index(self) -> int:
        return len(self._items) - 1

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def select_next(self) -> None:
        self._current_index = min(self._current_index + 1, self.max_index)

    def select_previous(self) -> None:
        self._current_index = max(self._current_index - 1, 0)

    def current(self) -> T:
        return self._items[self._current_index]


def list_slice(length: int, current: int, window_size: int) -> range | None:
    """The part of a list around ``current`` that fits into ``window_size`` rows."""
    if length == 0 or window_size == 0 or current >= length:
        return None
    half_window = window_size // 2
    n_items_after_current = (length - 1) - current
    if n_items_after_current < half_window:
        return range(max(length - window_size, 0), length)
    start = max(current - half_window, 0)
    return range(start, min(start + window_size, length))


def text_search(items: Sequence[object], text: str) -> int | None:
    """Index of the first item whose text contains ``text``, ignoring ASCII case."""
    needle = text.translate(_ASCII_LOWER)
    return next(
        (
            index
            for index, item in enumerate(items)
            if needle in str(item).translate(_ASCII_LOWER)
        ),
        None,
    )