# aos2save

Read, edit and write the save files of *Acceleration of SUGURI 2*.

The game keeps two files in its saves folder (the one ending in
`Documents/Fruitbat Factory/AoS2`):

- `game.sys` — player progress: unlocked characters, arenas and music,
  single-player win counters and 1CC (no-death) completion marks.
  The body of this file is obfuscated with a rolling XOR key
  (`aos2save.xor_encoding`); the package decodes and re-encodes it,
  keeping bytes of unknown purpose as they were.
- `player.rkg` — the online profile: nickname, lobby name and password,
  avatar character and background, unlock lists, title text, title
  colour and the character peeking from the title background.

Close the game before editing. It keeps its own copy in memory and will
overwrite your changes otherwise.

## Installation

```
pip install .
```

No third-party libraries are needed at run time. To run the tests:

```
pip install ".[test]"
pytest
```

## The editor

```
aos2-save-editor
```

With no argument the saves folder is derived from the `HOME` environment
variable: `HOME/Documents/Fruitbat Factory/AoS2` on Windows, and the
Steam/Proton prefix
(`HOME/.local/share/Steam/steamapps/compatdata/390710/pfx/drive_c/users/steamuser/Documents/Fruitbat Factory/AoS2`)
everywhere else. Pass the folder explicitly if yours lives elsewhere:

```
aos2-save-editor "/path/to/Documents/Fruitbat Factory/AoS2"
```

The editor has four tabs:

- **Statistics** — win counters and a per-character table of Arcade
  (Easy, Medium, Hard) and Story 1CCs. Read only.
- **Progress** — toggle characters, arenas and music tracks on and off.
- **Online Avatar** — pick the avatar character and background.
- **Online Title** — pick the title colour, background character and
  title text.

| Key             | Action                                         |
|-----------------|------------------------------------------------|
| Arrow keys      | Up/Down within a table, Left/Right between them |
| Enter           | Toggle or pick the hovered item                |
| PgUp / PgDown   | Switch tabs                                    |
| Home / End      | Jump to the start/end of a list                |
| Typing letters  | Search the current list (avatar and title tabs) |
| F12             | Toggle help                                    |
| Escape          | Exit                                           |

Typed letters build up a search text; a pause of more than half a
second starts a new one, and at most 32 characters are kept.

Every change is written back to disk right after the key that made it.
If a file cannot be found, read or written, the editor switches to an
error screen that explains what went wrong; Escape still exits.

Keep at least two or three options enabled in every progress category,
or the game tends to crash at character select.

## Comparing two save files

```
aos2-easydiff game-before.sys game-after.sys
```

Both names are joined onto the saves folder found from `HOME` and must
exist. The tool reports whether the files are identical, which bytes
changed (position, old and new value, in decimal and hex), or, for files
of different sizes, the two sizes and the first differing byte in the
overlapping part.

## Using the library

```python
from pathlib import Path

from aos2save.env import AoS2Env
from aos2save.player_progress import PlayerProgress
from aos2save.online_profile import PlayerOnlineProfile
from aos2save.unlockables import Character, PlayableCharacters
from aos2save.runs import PerfectArcadeMode
from aos2save.ascii_text import Nickname
from aos2save.title import TitleText
from aos2save.easydiff import FileDifference

env = AoS2Env.from_path(Path.home() / "Documents" / "Fruitbat Factory" / "AoS2")

progress = PlayerProgress.load(env)
progress.playable_characters = PlayableCharacters.all()
progress.playable_characters.toggle(Character.HIME)
progress.arcade_hard_1ccs = PerfectArcadeMode.completed()
progress.save(env)

profile = PlayerOnlineProfile.load(env)
profile.nickname = Nickname("Player")
profile.title_text_id = TitleText.GLHF
profile.save(env)

# A 172-byte game.sys decodes and re-encodes to the same bytes.
raw = (env.saves_folder / "game.sys").read_bytes()
assert PlayerProgress.decode(raw).encode() == raw

print(FileDifference.between(b"\x00\x01\x02", b"\x00\xff\x02"))
```

`save` and `save_to_file` only overwrite an existing file; they never
create a missing one.

`aos2save.savefile.Savefile` loads both files of a folder at once and
writes back only what changed (`save_all`).

Errors are raised as exceptions: `EnvError` when `HOME` is not set,
`ProgressError` and `ProfileError` (with a `kind`) for missing files,
missing write permission or malformed content, `AsciiTextError` for text
fields of the wrong length or with non-ASCII characters, and
`SavefileError` wrapping any of the first three.

## What it does not do

- The editor needs the standard `curses` module. Python builds without
  it (the usual Windows installer, for one) can use the library and
  `aos2-easydiff`, but `aos2-save-editor` only prints an error.
- The editor draws plain text without colours.
- DLC music is not in `game.sys`, so it cannot be unlocked here.
- Nickname, lobby name, lobby password and the unlock lists of
  `player.rkg` can be changed through the library, not in the editor.