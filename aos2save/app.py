"""The terminal save editor."""

from __future__ import annotations

import argparse
import os
import sys
import time
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from aos2save.avatar import AvatarBackground, AvatarCharacter
from aos2save.collection import SelectableArray, list_slice
from aos2save.event import Event, Key, KeyInput
from aos2save.runs import Run
from aos2save.savefile import Savefile, SavefileError
from aos2save.tables import ChoiceTable, TableCollection, ToggleTable
from aos2save.title import TitleCharacter, TitleColor, TitleText
from aos2save.unlockables import Arena, Character, MusicTrack

try:
    import curses
except ImportError:  # pragma: no cover - platforms without curses
    curses = None  # type: ignore[assignment]

_CURSES_ERRORS: tuple[type[BaseException], ...] = (
    (curses.error,) if curses is not None else ()
)

TITLE = "AoS2 Save Editor"
HELP_KEY = Key.F12
_WIDTH = 80
_COLUMN_WIDTH = 24
_SEPARATOR = " │ "

_HELP_LINES = (
    "General controls:",
    "",
    ">> Arrow Keys - Navigate tables",
    ">> Enter - Interact with selected item",
    ">> PgUp / PgDown - Switch tabs",
    ">> Home / End - Go to start/end of the list",
    ">> Escape - Exit",
    "",
    "All changes are saved automatically when you make them",
    "",
    "Close the game before editing",
    "Otherwise, it will ignore your changes",
    "",
    "If any issues occur, report them on GitHub",
)

_STATISTICS_INFO = (
    "Statistics from singleplayer matches",
    "",
    "Normally, you unlock stuff based on these stats.",
)

_PROGRESS_INFO = (
    "!! Keep at least 2-3 options enabled in each category !!",
    "Otherwise the game will just crash at character select regularly.",
    "",
    "Yes, you CAN disable Iru and Sham :trol face:",
    "",
    "DLC music is not available - Steam controls it, not the savefile.",
)

_AVATAR_INFO = (
    "Character and Background on your profile",
    "Nothing very interesting here, if you ask me...",
    "Check out Titles instead",
)

_TITLE_INFO = (
    "Choose any multiplayer title - free of charge",
    "",
    "Start typing with your keyboard for easy search (lists are long)",
    "",
    '"Background character" changes character eyes in the title background',
    "For some reason, this setting can turn Titles On/Off...",
)


def _fit(text: str, width: int) -> str:
    return text[:width].ljust(width)


def _padded(lines: Sequence[str], height: int) -> list[str]:
    height = max(height, 0)
    return [*lines[:height], *([""] * (height - len(lines)))]


def _table_column(table: ChoiceTable | ToggleTable, active: bool, height: int) -> list[str]:
    if height <= 0:
        return []
    title = f"[{table.name}]" if active else table.name
    column = [_fit(title.center(_COLUMN_WIDTH), _COLUMN_WIDTH)]
    rows = table.rows()
    window = list_slice(len(rows), table.hovered, height - 1)
    off, on = table.MARKS
    for index in window or ():
        label, flag = rows[index]
        pointer = ">" if active and index == table.hovered else " "
        column.append(_fit(f"{pointer} {on if flag else off} {label}", _COLUMN_WIDTH))
    column.extend([" " * _COLUMN_WIDTH] * (height - len(column)))
    return column


def _render_tables(tables: TableCollection, height: int) -> list[str]:
    columns = [
        _table_column(table, index == tables.current_index, height)
        for index, table in enumerate(tables)
    ]
    return [_SEPARATOR.join(cells).rstrip() for cells in zip(*columns)]


def _run_text(run: Run | None) -> str:
    if run is None:
        return "Cannot"
    return "Done" if run.is_completed() else "Not done"


def _statistics_body(savefile: Savefile) -> Callable[[int], list[str]]:
    wins_view = savefile.progress.read_wins()
    stats_view = savefile.progress.read_completion_stats()

    def render(height: int) -> list[str]:
        wins = wins_view.get()
        stats = stats_view.get()
        left = [
            "Easy arcade 1CCs:",
            f"    {wins.n_arcade_easy_1ccs}",
            "",
            "Medium arcade 1CCs:",
            f"    {wins.n_arcade_medium_1ccs}",
            "",
            "Hard arcade 1CCs:",
            f"    {wins.n_arcade_hard_1ccs}",
            "",
            "Story 1CCs:",
            f"    {wins.n_story_1ccs}",
            "",
            "Total matches won:",
            f"    {wins.total}",
        ]
        headers = (
            "Character 1CC",
            "Arcade Easy",
            "Arcade Medium",
            "Arcade Hard",
            "Story (Any)",
        )
        right = [_SEPARATOR.join(_fit(header, 14) for header in headers)]
        story: list[Run | None] = [*stats.story_any.to_list(), None]
        for character, easy, medium, hard, story_run in zip(
            Character,
            stats.arcade_easy.to_list(),
            stats.arcade_medium.to_list(),
            stats.arcade_hard.to_list(),
            story,
        ):
            cells = (str(character), *(_run_text(run) for run in (easy, medium, hard, story_run)))
            right.append(_SEPARATOR.join(_fit(cell, 14) for cell in cells))
        rows = max(len(left), len(right))
        left = _padded(left, rows)
        right = _padded(right, rows)
        combined = [
            f"{_fit(l, 22)}{_SEPARATOR}{r}".rstrip() for l, r in zip(left, right)
        ]
        return combined[: max(height, 0)]

    return render


@dataclass
class Tab:
    """One page of the editor: some explanatory text and its content."""

    name: str
    info: tuple[str, ...] = ()
    tables: TableCollection | None = None
    body: Callable[[int], list[str]] | None = None

    def handle_event(self, event: Event) -> None:
        if self.tables is not None:
            self.tables.handle_event(event)

    def render_lines(self, height: int) -> list[str]:
        lines = [*self.info, "─" * _WIDTH]
        remaining = max(height - len(lines), 0)
        if self.tables is not None:
            lines.extend(_render_tables(self.tables, remaining))
        elif self.body is not None:
            lines.extend(self.body(remaining))
        return lines[: max(height, 0)]


def _build_tabs(savefile: Savefile) -> list[Tab]:
    progress = savefile.progress
    profile = savefile.profile
    return [
        Tab("Statistics", _STATISTICS_INFO, body=_statistics_body(savefile)),
        Tab(
            "Progress",
            _PROGRESS_INFO,
            tables=TableCollection(
                [
                    ToggleTable("Characters", progress.modify_playable_characters(), Character),
                    ToggleTable("Arenas", progress.modify_arenas(), Arena),
                    ToggleTable("Music", progress.modify_music_tracks(), MusicTrack),
                ]
            ),
        ),
        Tab(
            "Online Avatar",
            _AVATAR_INFO,
            tables=TableCollection(
                [
                    ChoiceTable("Character", profile.modify_avatar_character(), AvatarCharacter),
                    ChoiceTable("Background", profile.modify_avatar_background(), AvatarBackground),
                ]
            ),
        ),
        Tab(
            "Online Title",
            _TITLE_INFO,
            tables=TableCollection(
                [
                    ChoiceTable("Color", profile.modify_title_color(), TitleColor),
                    ChoiceTable(
                        "Background Character",
                        profile.modify_title_character(),
                        TitleCharacter,
                    ),
                    ChoiceTable("Title Text", profile.modify_title_text(), TitleText),
                ]
            ),
        ),
    ]


class Editor:
    """Tabs over a loaded savefile, with a help page toggled by F12."""

    def __init__(self, savefile: Savefile) -> None:
        self.savefile = savefile
        self.tabs = SelectableArray(_build_tabs(savefile))
        self.show_help = False

    def handle_event(self, event: Event) -> None:
        if event.key is HELP_KEY:
            self.show_help = not self.show_help
        elif self.show_help:
            return
        elif event.key is Key.PAGE_UP:
            self.tabs.select_previous()
        elif event.key is Key.PAGE_DOWN:
            self.tabs.select_next()
        else:
            self.tabs.current().handle_event(event)

    def handle_savefile_updates(self) -> None:
        """Write whatever changed; raises SavefileError on failure."""
        self.savefile.save_all()

    def render_lines(self, height: int) -> list[str]:
        if height <= 0:
            return []
        tab_bar = " | ".join(
            f"[{tab.name}]" if index == self.tabs.current_index else f" {tab.name} "
            for index, tab in enumerate(self.tabs)
        )
        content_height = max(height - 3, 0)
        if self.show_help:
            body = _padded(["[HELP]", *_HELP_LINES], content_height)
        else:
            body = _padded(self.tabs.current().render_lines(content_height), content_height)
        footer = f"Press `{HELP_KEY}` to toggle help"
        return [TITLE.center(_WIDTH).rstrip(), tab_bar, *body, footer][:height]


def _limbo_lines(error: SavefileError, height: int) -> list[str]:
    lines = ["Error".center(_WIDTH).rstrip(), "─" * _WIDTH, *str(error).splitlines()]
    return _padded(lines, height)


_CHAR_KEYS = {"\x1b": Key.ESC, "\n": Key.ENTER, "\r": Key.ENTER}


def _translate_key(value: Any) -> KeyInput | None:
    if isinstance(value, str):
        if value in _CHAR_KEYS:
            return _CHAR_KEYS[value]
        return value if len(value) == 1 and value.isprintable() else None
    if curses is None:
        return None
    mapping = {
        curses.KEY_UP: Key.UP,
        curses.KEY_DOWN: Key.DOWN,
        curses.KEY_LEFT: Key.LEFT,
        curses.KEY_RIGHT: Key.RIGHT,
        curses.KEY_HOME: Key.HOME,
        curses.KEY_END: Key.END,
        curses.KEY_ENTER: Key.ENTER,
        curses.KEY_PPAGE: Key.PAGE_UP,
        curses.KEY_NPAGE: Key.PAGE_DOWN,
        curses.KEY_F12: Key.F12,
    }
    return mapping.get(value)


class App:
    """The editor, or an error screen when the save files cannot be used."""

    def __init__(self, screen: Editor | SavefileError, now: float | None = None) -> None:
        self.should_run = True
        self.screen = screen
        self.previous_event = Event.empty(time.monotonic() if now is None else now)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> App:
        try:
            savefile = Savefile.from_env(environ)
        except SavefileError as error:
            return cls(error)
        return cls(Editor(savefile))

    @classmethod
    def from_path(cls, path: str | os.PathLike[str]) -> App:
        try:
            savefile = Savefile.from_path(path)
        except SavefileError as error:
            return cls(error)
        return cls(Editor(savefile))

    def handle_event(self, event: Event) -> None:
        if event.key is Key.ESC:
            self.should_run = False
        elif isinstance(self.screen, Editor):
            self.screen.handle_event(event)

    def handle_key(self, key: KeyInput | None, now: float | None = None) -> None:
        """Process one input and save whatever it changed."""
        if now is None:
            now = time.monotonic()
        event = self.previous_event.follow_with(key, now)
        self.handle_event(event)
        self.previous_event = event
        if isinstance(self.screen, Editor):
            try:
                self.screen.handle_savefile_updates()
            except SavefileError as error:
                self.screen = error

    def render_lines(self, height: int) -> list[str]:
        if isinstance(self.screen, Editor):
            return self.screen.render_lines(height)
        return _limbo_lines(self.screen, height)

    def run(self, screen: Any) -> None:
        """Draw and read keys on a curses window until Escape is pressed."""
        while self.should_run:
            height, width = screen.getmaxyx()
            screen.erase()
            for row, line in enumerate(self.render_lines(height)):
                try:
                    screen.addnstr(row, 0, line, max(width - 1, 0))
                except _CURSES_ERRORS:
                    pass
            screen.refresh()
            self.handle_key(_translate_key(screen.get_wch()), time.monotonic())


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="aos2-save-editor", description="The editor app for AoS2 game saves"
    )
    parser.add_argument(
        "saves_folder",
        nargs="?",
        type=Path,
        help="Path to saves folder (ends with `Documents/Fruitbat Factory/AoS2`).",
    )
    args = parser.parse_args(argv)
    if curses is None:
        print("Error: a curses-capable terminal is required", file=sys.stderr)
        return 1
    app = App.from_path(args.saves_folder) if args.saves_folder else App.from_env()
    os.environ.setdefault("ESCDELAY", "25")
    curses.wrapper(app.run)
    return 0


if __name__ == "__main__":
    sys.exit(main())