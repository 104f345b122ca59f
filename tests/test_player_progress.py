import pytest

from aos2save.env import AoS2Env
from aos2save.player_progress import PlayerProgress, ProgressError
from aos2save.runs import PerfectArcadeMode, PerfectStoryMode
from aos2save.unlockables import Arena, Character, MusicTrack, PlayableCharacters
from aos2save.xor_encoding import encode_body


def _encode_decoded(decoded):
    decoded = bytes(decoded)
    return decoded[:8] + encode_body(decoded[8:], PlayerProgress.ENCODING_START_KEY)


@pytest.fixture
def busy_progress():
    progress = PlayerProgress(version=161, unknown=bytes(range(PlayerProgress.UNKNOWN_SIZE)))
    progress.playable_characters = PlayableCharacters.all()
    progress.arenas.toggle(Arena.SUMIKA_HIDEOUT)
    progress.arenas.unused = 7
    progress.music_tracks.toggle(MusicTrack.MGOM)
    progress.wins.total = 1234
    progress.wins.n_story_1ccs = 5
    progress.arcade_hard_1ccs = PerfectArcadeMode.completed()
    progress.story_1ccs = PerfectStoryMode.completed()
    return progress


def test_sizes():
    progress = PlayerProgress()
    encoded = progress.encode()
    decoded = progress.to_decoded()
    assert len(encoded) == PlayerProgress.TOTAL_SIZE == 172
    assert len(decoded) == 172
    assert len(encoded) - PlayerProgress.HEADER_SIZE == PlayerProgress.BODY_SIZE == 164
    assert len(PlayerProgress().unknown) == PlayerProgress.UNKNOWN_SIZE == 44


def test_default_round_trip():
    progress = PlayerProgress()
    assert PlayerProgress.decode(progress.encode()) == progress


def test_encoded_header_is_plain():
    encoded = PlayerProgress(version=161).encode()
    assert len(encoded) == 172
    assert encoded[4:8] == (164).to_bytes(4, "little")


def test_busy_round_trip(busy_progress):
    encoded = busy_progress.encode()
    decoded = PlayerProgress.decode(encoded)
    assert decoded == busy_progress
    assert decoded.version == 161
    assert decoded.unknown == bytes(range(44))
    assert decoded.arenas.unused == 7
    assert decoded.encode() == encoded


def test_decoded_layout(busy_progress):
    decoded = busy_progress.to_decoded()
    assert decoded[0x08:0x0C] == (161).to_bytes(4, "little")
    assert decoded[0x0F:0x1E] == b"\x01" * 15
    assert decoded[0x2D] == 7
    assert decoded[0x4C:0x50] == (1234).to_bytes(4, "little")
    assert decoded[0x89:0x98] == b"\x01" * 15
    assert decoded[0x9C:0xAA] == b"\x01" * 14
    assert decoded[0x63:0x72] == bytes(15)


def test_encoded_file_round_trip(busy_progress):
    encoded = bytearray(busy_progress.encode())
    assert PlayerProgress.decode(bytes(encoded)).encode() == bytes(encoded)


def test_trailing_bytes_ignored(busy_progress):
    encoded = busy_progress.encode()
    assert PlayerProgress.decode(encoded + b"\xff\xff") == busy_progress


def test_short_data_rejected():
    with pytest.raises(ProgressError) as info:
        PlayerProgress.decode(bytes(171))
    assert info.value.kind is ProgressError.Kind.ENCODED_READ


def test_bad_body_length_rejected():
    decoded = bytearray(PlayerProgress().to_decoded())
    decoded[4] = 0
    with pytest.raises(ProgressError) as info:
        PlayerProgress.decode(_encode_decoded(decoded))
    assert info.value.kind is ProgressError.Kind.DECODED_READ


def test_bad_status_byte_rejected():
    decoded = bytearray(PlayerProgress().to_decoded())
    decoded[0x0F] = 2
    with pytest.raises(ProgressError) as info:
        PlayerProgress.decode(_encode_decoded(decoded))
    assert info.value.kind is ProgressError.Kind.DECODED_READ


def test_out_of_range_counter_rejected():
    progress = PlayerProgress()
    progress.wins.total = 1 << 32
    with pytest.raises(ProgressError) as info:
        progress.encode()
    assert info.value.kind is ProgressError.Kind.DECODED_WRITE


def test_wrong_unknown_size():
    with pytest.raises(ValueError):
        PlayerProgress(unknown=bytes(3))


def test_default_unlocks():
    progress = PlayerProgress()
    assert not progress.playable_characters[Character.HIME].is_enabled()
    assert progress.playable_characters[Character.SORA].is_enabled()


def test_missing_file_not_found(tmp_path):
    with pytest.raises(ProgressError) as info:
        PlayerProgress.from_file(tmp_path / "game.sys")
    assert info.value.kind is ProgressError.Kind.NOT_FOUND
    assert str(info.value) == "File does not exist"


def test_save_does_not_create(tmp_path):
    with pytest.raises(ProgressError) as info:
        PlayerProgress().save_to_file(tmp_path / "game.sys")
    assert info.value.kind is ProgressError.Kind.NOT_FOUND
    assert not (tmp_path / "game.sys").exists()


def test_read_directory_fails(tmp_path):
    with pytest.raises(ProgressError) as info:
        PlayerProgress.from_file(tmp_path)
    assert info.value.kind is ProgressError.Kind.FILE_READ


def test_save_and_load_with_env(tmp_path, busy_progress):
    path = tmp_path / PlayerProgress.FILE_NAME
    path.write_bytes(b"x" * 500)
    env = AoS2Env.from_path(tmp_path)
    busy_progress.save(env)
    assert path.stat().st_size == 172
    assert PlayerProgress.load(env) == busy_progress