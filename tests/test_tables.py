import pytest

from aos2save.event import Event, Key
from aos2save.online_profile import PlayerOnlineProfile
from aos2save.player_progress import PlayerProgress
from aos2save.savefile import Savefile
from aos2save.tables import ChoiceTable, TableCollection, ToggleTable
from aos2save.title import TitleColor
from aos2save.unlockables import Arena, Character, MusicTrack


@pytest.fixture
def savefile(tmp_path):
    (tmp_path / PlayerProgress.FILE_NAME).write_bytes(PlayerProgress().encode())
    (tmp_path / PlayerOnlineProfile.FILE_NAME).write_bytes(
        PlayerOnlineProfile().to_bytes()
    )
    return Savefile.from_path(tmp_path)


def press(key):
    return Event.empty(0.0).follow_with(key, 0.0)


def typed(text):
    event = Event.empty(0.0)
    for index, character in enumerate(text):
        event = event.follow_with(character, 0.1 * index)
        yield event


def color_table(savefile):
    return ChoiceTable("Color", savefile.profile.modify_title_color(), TitleColor)


def test_choice_table_starts_at_stored_value(savefile):
    table = color_table(savefile)
    members = list(TitleColor)
    assert table.hovered == members.index(TitleColor.default())
    assert table.selected_index() == table.hovered


def test_choice_table_starts_at_non_default_value(savefile):
    modify = savefile.profile.modify_title_color()
    modify.send(TitleColor.RED)
    table = ChoiceTable("Color", modify, TitleColor)
    assert table.hovered == list(TitleColor).index(TitleColor.RED)


def test_choice_table_enter_stores_hovered(savefile):
    modify = savefile.profile.modify_title_color()
    table = ChoiceTable("Color", modify, TitleColor)
    table.handle_event(press(Key.DOWN))
    assert table.hovered == list(TitleColor).index(TitleColor.BLUE)
    table.handle_event(press(Key.ENTER))
    assert modify.get() == TitleColor.BLUE
    assert table.selected_index() == table.hovered


def test_choice_table_navigation_is_clamped(savefile):
    table = color_table(savefile)
    table.handle_event(press(Key.UP))
    assert table.hovered == 0
    table.handle_event(press(Key.END))
    assert table.hovered == len(TitleColor) - 1
    table.handle_event(press(Key.DOWN))
    assert table.hovered == len(TitleColor) - 1
    table.handle_event(press(Key.HOME))
    assert table.hovered == 0


def test_choice_table_text_search(savefile):
    table = color_table(savefile)
    for event in typed("red"):
        table.handle_event(event)
    assert table.hovered == list(TitleColor).index(TitleColor.RED)


def test_choice_table_search_without_match_keeps_hovered(savefile):
    table = color_table(savefile)
    table.handle_event(press(Key.END))
    before = table.hovered
    table.handle_event(press("z"))
    assert table.hovered == before


def test_choice_table_rows_mark_only_selected(savefile):
    table = color_table(savefile)
    rows = table.rows()
    assert [label for label, _ in rows] == [str(member) for member in TitleColor]
    flagged = [index for index, (_, flag) in enumerate(rows) if flag]
    assert flagged == [table.selected_index()]


def music_table(savefile):
    return ToggleTable("Music", savefile.progress.modify_music_tracks(), MusicTrack)


def test_toggle_table_rows_cover_members(savefile):
    rows = music_table(savefile).rows()
    assert [label for label, _ in rows] == [str(track) for track in MusicTrack]


def test_toggle_table_enter_flips_once_and_back(savefile):
    table = music_table(savefile)
    before = table.rows()
    table.handle_event(press(Key.ENTER))
    after = table.rows()
    assert after[0][1] is not before[0][1]
    assert after[1:] == before[1:]
    table.handle_event(press(Key.ENTER))
    assert table.rows() == before


def test_toggle_table_flips_only_hovered(savefile):
    table = music_table(savefile)
    before = table.rows()
    table.handle_event(press(Key.DOWN))
    table.handle_event(press(Key.ENTER))
    after = table.rows()
    changed = [index for index, (old, new) in enumerate(zip(before, after)) if old != new]
    assert changed == [table.hovered]


def test_toggle_table_navigation_is_clamped(savefile):
    table = ToggleTable(
        "Characters", savefile.progress.modify_playable_characters(), Character
    )
    table.handle_event(press(Key.UP))
    assert table.hovered == 0
    table.handle_event(press(Key.END))
    assert table.hovered == len(Character) - 1
    table.handle_event(press(Key.DOWN))
    assert table.hovered == len(Character) - 1


def test_arena_toggles_invert_every_row(savefile):
    modify = savefile.progress.modify_arenas()
    table = ToggleTable("Arenas", modify, Arena)
    before = table.rows()
    assert len(before) == len(Arena)
    for _ in Arena:
        table.handle_event(press(Key.ENTER))
        table.handle_event(press(Key.DOWN))
    assert table.rows() == [(label, not flag) for label, flag in before]


def test_arena_toggle_changes_one_byte(savefile):
    modify = savefile.progress.modify_arenas()
    table = ToggleTable("Arenas", modify, Arena)
    before = modify.get().to_bytes()
    table.handle_event(press(Key.END))
    table.handle_event(press(Key.ENTER))
    after = modify.get().to_bytes()
    assert len(after) == len(before)
    assert sum(old != new for old, new in zip(before, after)) == 1


def progress_collection(savefile):
    progress = savefile.progress
    return TableCollection(
        [
            ToggleTable("Characters", progress.modify_playable_characters(), Character),
            ToggleTable("Arenas", progress.modify_arenas(), Arena),
            ToggleTable("Music", progress.modify_music_tracks(), MusicTrack),
        ]
    )


def test_collection_moves_between_tables(savefile):
    collection = progress_collection(savefile)
    start = collection.current_index
    collection.handle_event(press(Key.RIGHT))
    assert collection.current_index == start + 1
    for _ in range(len(collection) * 2):
        collection.handle_event(press(Key.RIGHT))
    assert collection.current_index == len(collection) - 1
    for _ in range(len(collection) * 2):
        collection.handle_event(press(Key.LEFT))
    assert collection.current_index == start


def test_collection_forwards_other_keys_to_current(savefile):
    collection = progress_collection(savefile)
    first = collection.current()
    collection.handle_event(press(Key.RIGHT))
    collection.handle_event(press(Key.DOWN))
    assert collection.current().hovered == first.hovered + 1
    assert collection.current() is not first