"""Interactive tables that edit values held in the save files."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from typing import Any, ClassVar

from aos2save.collection import (
    HoveringIndex,
    RadioButtonIndex,
    SelectableArray,
    text_search,
)
from aos2save.event import Event, Key
from aos2save.savefile import Modify
from aos2save.unlockables import Arenas

# Arenas keep one byte of unknown purpose between the 9th and 10th arena.
_ARENAS_UNUSED_POSITION = 9


def _status_bytes(container: Any, count: int) -> bytes:
    """One status byte per member of an unlockables container."""
    raw = container.to_bytes()
    if len(raw) == count:
        return raw
    if isinstance(container, Arenas) and len(raw) == count + 1:
        return raw[:_ARENAS_UNUSED_POSITION] + raw[_ARENAS_UNUSED_POSITION + 1 :]
    raise ValueError(
        f"{type(container).__name__} holds {len(raw)} bytes for {count} members"
    )


class ChoiceTable:
    """Pick exactly one value out of a list of members."""

    MARKS: ClassVar[tuple[str, str]] = ("[ ]", "[X]")

    def __init__(self, name: str, data: Modify, members: Iterable[Any]) -> None:
        self.name = name
        self.members = tuple(members)
        if not self.members:
            raise ValueError("a table needs at least one member")
        self._data = data
        self.hovered = self.selected_index() or 0

    def _index_of(self, value: Any) -> int | None:
        return next(
            (index for index, member in enumerate(self.members) if member == value),
            None,
        )

    def selected_index(self) -> int | None:
        """Position of the value currently stored, if it is a known member."""
        return self._index_of(self._data.get())

    def handle_event(self, event: Event) -> None:
        index = (
            RadioButtonIndex.for_items(self.members)
            .with_selected(self.selected_index() or 0)
            .with_hovered(self.hovered)
        )
        key = event.key
        if key is Key.UP:
            self.hovered = index.hover_previous().hovered or 0
        elif key is Key.DOWN:
            self.hovered = index.hover_next().hovered or 0
        elif key is Key.HOME:
            self.hovered = index.hover_first().hovered or 0
        elif key is Key.END:
            self.hovered = index.hover_last().hovered or 0
        elif key is Key.ENTER:
            chosen = index.select_hovered().selected or 0
            self._data.send(self.members[chosen])
        elif isinstance(key, str):
            found = text_search(self.members, event.accumulated_input)
            if found is not None:
                self.hovered = found

    def rows(self) -> list[tuple[str, bool]]:
        """Label of every member and whether it is the stored value."""
        selected = self.selected_index()
        return [
            (str(member), index == selected) for index, member in enumerate(self.members)
        ]


class ToggleTable:
    """Switch members of an unlockables container on and off."""

    MARKS: ClassVar[tuple[str, str]] = ("X", "+")

    def __init__(self, name: str, data: Modify, members: Iterable[Any]) -> None:
        self.name = name
        self.members = tuple(members)
        if not self.members:
            raise ValueError("a table needs at least one member")
        self._data = data
        self.hovered = 0

    def handle_event(self, event: Event) -> None:
        cursor = HoveringIndex.for_items(self.members).with_current(self.hovered)
        key = event.key
        if key is Key.UP:
            self.hovered = cursor.previous().index or 0
        elif key is Key.DOWN:
            self.hovered = cursor.next().index or 0
        elif key is Key.HOME:
            self.hovered = cursor.first().index or 0
        elif key is Key.END:
            self.hovered = cursor.last().index or 0
        elif key is Key.ENTER:
            container = self._data.get()
            if 0 <= self.hovered < len(self.members):
                container.toggle(self.members[self.hovered])
            self._data.send(container)

    def rows(self) -> list[tuple[str, bool]]:
        """Label of every member and whether it is enabled."""
        raw = _status_bytes(self._data.get(), len(self.members))
        return [(str(member), byte == 1) for member, byte in zip(self.members, raw)]


class TableCollection:
    """Tables side by side; Left and Right move between them."""

    def __init__(self, tables: Sequence[ChoiceTable | ToggleTable]) -> None:
        self.tables = SelectableArray(tables)

    @property
    def current_index(self) -> int:
        return self.tables.current_index

    def __iter__(self) -> Iterator[ChoiceTable | ToggleTable]:
        return iter(self.tables)

    def __len__(self) -> int:
        return len(self.tables)

    def handle_event(self, event: Event) -> None:
        if event.key is Key.LEFT:
            self.tables.select_previous()
        elif event.key is Key.RIGHT:
            self.tables.select_next()
        else:
            self.tables.current().handle_event(event)

    def current(self) -> ChoiceTable | ToggleTable:
        return self.tables.current()