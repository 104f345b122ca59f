import struct

import pytest

from aos2save.ascii_text import LobbyName, LobbyPassword, Nickname
from aos2save.avatar import AvatarBackground, AvatarCharacter
from aos2save.env import AoS2Env
from aos2save.online_profile import PlayerOnlineProfile, ProfileError, Visibility
from aos2save.title import TitleCharacter, TitleColor, TitleText


def _u32(value):
    return struct.pack("<I", value)


@pytest.fixture
def player_file():
    sections = [
        bytes([0xA1, 0x05, 0x00, 0x00]),  # version
        bytes([0x01]),  # show country
        _u32(6),
        b"Tester",
        _u32(14),
        b"Friendly lobby",
        _u32(8),
        b"password",
        bytes([0x0E, 0x00, 0x00, 0x00]),  # avatar character
        bytes([0x13, 0x00, 0x00, 0x00]),  # avatar background
        _u32(33),
        bytes(33),
        _u32(19),
        bytes(19),
        bytes([0x0E, 0x00, 0x00, 0x00]),  # title background character
        bytes([0x03, 0x01, 0x00, 0x00]),  # title text
        _u32(285),
        bytes(285),
        bytes([0x01]),
        bytes([0x01]),
        bytes([0x01]),
        bytes([0x01, 0x00, 0x00, 0x00]),  # title color
    ]
    return b"".join(sections)


def test_player_file_parses(player_file):
    profile = PlayerOnlineProfile.from_bytes(player_file)
    assert profile.country is Visibility.SHOW
    assert profile.nickname == Nickname("Tester")
    assert profile.lobby_name == LobbyName("Friendly lobby")
    assert profile.lobby_password == LobbyPassword("password")
    assert profile.avatar_character is AvatarCharacter.HIME
    assert profile.avatar_background is AvatarBackground.AURORA
    assert len(profile.unlockable_avatars) == 33
    assert len(profile.unlockable_backgrounds) == 19
    assert len(profile.titles) == 285
    assert profile.title_character_in_background is TitleCharacter.HIME
    assert profile.title_text_id is TitleText.HIME_WAIFU
    assert profile.ingame_title is Visibility.SHOW
    assert profile.spectators is Visibility.SHOW
    assert profile.title_color is TitleColor.BLUE


def test_player_file_round_trip(player_file):
    profile = PlayerOnlineProfile.from_bytes(player_file)
    assert profile.to_bytes() == player_file


def test_default_profile_round_trip():
    profile = PlayerOnlineProfile()
    parsed = PlayerOnlineProfile.from_bytes(profile.to_bytes())
    assert parsed == profile
    assert parsed.nickname == Nickname("Suguri")
    assert parsed.avatar_character is AvatarCharacter.SUGURI


def test_unlock_all_survives_round_trip(player_file):
    profile = PlayerOnlineProfile.from_bytes(player_file)
    profile.titles.unlock_all()
    parsed = PlayerOnlineProfile.from_bytes(profile.to_bytes())
    assert parsed.titles.is_fully_unlocked()
    assert not parsed.unlockable_avatars.is_fully_unlocked()


def test_bad_version_fails(player_file):
    corrupted = b"\x00" + player_file[1:]
    with pytest.raises(ProfileError) as info:
        PlayerOnlineProfile.from_bytes(corrupted)
    assert info.value.kind is ProfileError.Kind.BIN_READ


def test_truncated_file_fails(player_file):
    with pytest.raises(ProfileError) as info:
        PlayerOnlineProfile.from_bytes(player_file[:-1])
    assert info.value.kind is ProfileError.Kind.BIN_READ


def test_invalid_visibility_fails(player_file):
    corrupted = player_file[:4] + b"\x02" + player_file[5:]
    with pytest.raises(ProfileError) as info:
        PlayerOnlineProfile.from_bytes(corrupted)
    assert info.value.kind is ProfileError.Kind.BIN_READ


def test_unknown_avatar_fails(player_file):
    offset = 4 + 1 + 4 + 6 + 4 + 14 + 4 + 8
    corrupted = player_file[:offset] + _u32(0x80) + player_file[offset + 4 :]
    with pytest.raises(ProfileError) as info:
        PlayerOnlineProfile.from_bytes(corrupted)
    assert info.value.kind is ProfileError.Kind.BIN_READ


def test_missing_file_not_found(tmp_path):
    with pytest.raises(ProfileError) as info:
        PlayerOnlineProfile.from_file(tmp_path / "player.rkg")
    assert info.value.kind is ProfileError.Kind.NOT_FOUND


def test_save_does_not_create_file(tmp_path):
    target = tmp_path / "player.rkg"
    with pytest.raises(ProfileError) as info:
        PlayerOnlineProfile().save_to_file(target)
    assert info.value.kind is ProfileError.Kind.NOT_FOUND
    assert not target.exists()


def test_save_and_load_through_env(tmp_path, player_file):
    (tmp_path / PlayerOnlineProfile.FILE_NAME).write_bytes(b"")
    env = AoS2Env.from_path(tmp_path)
    profile = PlayerOnlineProfile.from_bytes(player_file)
    profile.title_color = TitleColor.RED
    profile.save(env)
    loaded = PlayerOnlineProfile.load(env)
    assert loaded == profile
    assert loaded.title_color is TitleColor.RED