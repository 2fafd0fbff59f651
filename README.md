# kgplayer

kgplayer is the core of a small local music player, kept apart from any
user interface. It holds a library of audio files, sorts them onto pages,
looks up and follows LRC lyrics, and keeps the state of playback: the
playlist, the playback mode, volume and mute.

## Installation

```
pip install .
```

## Command line

```
kgplayer SONG.mp3 [SONG.flac ...] [--lyrics-at MS]
```

The command adds the given files to a library and prints one row per track
on the local page: the row number, then the name, singer and album,
separated by tabs. Only files ending in `.mp3`, `.mpga` or `.flac` are
taken. If none of the files is an audio file, it prints
`no audio files given` to standard error and exits with status 1.

With `--lyrics-at MS`, it then starts the local page at its first track and
prints the seven lyrics lines around position `MS` milliseconds, the
current line in the middle. If the track has no lyrics file, the middle
line reads `当前歌曲无歌词`.

## Modules

### `kgplayer.music`

- `parse_filename(filename)` returns `(title, singer, album)` from a name
  like `Title - Singer.mp3`. The title is the text before the first `-`,
  and the singer is the text between the dash and the first dot. When the
  name has no dash, the singer is `未知歌手` and the album is empty. When it
  has one, the album is `未知专辑`.
- `find_lyrics_file(music_path)` looks in the directory of the music file
  and returns the first of these that exists, or `None`:
  1. an `.lrc` file whose name contains every keyword (two or more
     characters long) of the music file's base name, ignoring case;
  2. an `.lrc` file whose name starts with the base name;
  3. `<base>.lrc`.
- `Music` is a dataclass holding `path`, `name`, `singer`, `album`,
  `duration`, `is_like`, `is_history` and a random `music_id`.
  `Music.from_path(path)` fills in the name, singer and album with
  `parse_filename`. `lrc_file_path()` calls `find_lyrics_file`.

### `kgplayer.library`

- `is_audio_file(path)` is true for `.mp3`, `.mpga` and `.flac`, in any
  letter case.
- `MusicLibrary` is an ordered collection of tracks. It provides
  `add_files(paths)`, which returns the tracks it added, as well as `add`,
  `find_by_id`, `find_by_path`, iteration and `len()`.

### `kgplayer.lyrics`

- `parse_lrc_line(line)` reads lines such as `[00:17.94]text` and
  `[0:58.600.00]text` into an `LrcLine(time, text)`, with the time in
  milliseconds. A time field that cannot be read counts as zero.
- `parse_lrc(path)` parses a whole file. It raises `OSError` if the file
  cannot be read.
- `Lyrics` holds the lines. `Lyrics.load(path)` reads them from a file.
  `line_index(position)` returns the index of the current line, or `None`
  when there are no lyrics. `line_text(index)` returns the text of a line,
  or `""` when the index is out of range. `window(position)` returns the
  seven lines around the current one.
- `wrap_text(text, max_width, measure)` splits text that is too wide into
  two lines. It breaks at the space, comma or dash nearest the middle, or
  cuts in the middle when there is none.

### `kgplayer.pages`

- `PageKind` has three members, each with its page name as its value:
  `LIKE` (`我喜欢`), `LOCAL` (`本地音乐`) and `RECENT` (`最近播放`).
- `MusicPage(kind)`:
  - `refresh(library)` rebuilds the page's `ListItem` rows.
  - `music_id_at(index)` returns the track id for a row. It raises
    `IndexError` when there is no such row.
  - `playlist_paths(library)` returns what playing the page queues. For
    the liked page this is the liked tracks. For the other two pages it is
    every track.
  - `play_all()` and `activate(index)` call the page's listeners.
- `ListItem.toggle_like()` flips a row's like flag and reports it to the
  page listener.

### `kgplayer.player`

- `PlaybackMode` has three members: `LOOP`, `RANDOM` and
  `CURRENT_ITEM_IN_LOOP`. Each member has an icon, a tooltip and a
  `following` mode.
- `PlayState` has three members: `STOPPED`, `PLAYING` and `PAUSED`.
- `format_time(milliseconds)` formats a duration as `MM:SS`.
- `Playlist` holds the queued paths and the current index. It provides
  `add`, `clear`, `set_current_index`, `next` and `previous`. How `next`
  and `previous` move depends on the mode. The mode starts as `RANDOM`.
- `MusicPlayer` connects a library, the three pages, the playlist, a
  navigation bar, a volume control and two recommendation boxes:
  - `toggle_play()` moves between playing and paused.
  - `cycle_mode()` switches to the next playback mode.
  - `play_page(kind, index)` queues a page and starts playing at `index`.
  - `update_like(is_like, music_id)` sets a track's like flag and
    refreshes every page.
  - `add_local_files(paths)` adds files to the library and queues the
    local page.
  - `on_current_index_changed(index)` marks the current track as played
    and loads its lyrics.
  - `on_position_changed(position)` updates the elapsed time and returns
    the lyrics window.
  - `on_duration_changed(duration)` updates the total time.
  - `set_volume(volume)` and `set_muted(muted)` store the volume and mute
    settings.

### `kgplayer.controls`

- `VolumeControl` models a vertical slider from y = 25 (100 %) to
  y = 205 (0 %), starting at 20 %. It provides `press`, `move`, `release`
  and `toggle_mute`.
- `ProgressSlider(max_width)` models a horizontal progress bar. It provides
  `press`, `move` and `release(x)`. `release(x)` reports the position as a
  fraction of the width.
- `NavBar` holds six `NavButton`s, for pages 0 to 5. `click(page_id)`
  highlights the chosen button and switches to its page. It raises
  `KeyError` for a page that has no button.

### `kgplayer.recommend`

- `random_pictures(rng)` returns the 40 recommendation pictures in random
  order. Each one is captioned `推荐-000`, `推荐-001` and so on.
- `RecBox(items, rows)` shows one group of items at a time: 4 per group in
  a one-row box, 8 in a two-row box. `next()` and `previous()` move
  through the groups and wrap around at either end.

## Example

```python
from kgplayer.library import MusicLibrary
from kgplayer.lyrics import Lyrics

library = MusicLibrary()
library.add_files(["Song - Singer.mp3"])
for music in library:
    print(music.name, music.singer, music.album)  # Song Singer 未知专辑
    lrc = music.lrc_file_path()
    if lrc is not None:
        print(Lyrics.load(lrc).window(17940))
```

## What it does not do

kgplayer keeps the state of playback but does not decode or play audio. It
does not read tags embedded in audio files: names and singers come only
from file names, and durations stay at zero. It has no graphical
interface. The icon and image strings it carries are resource names and
are not loaded. It does not save the library, likes or history between
runs.

## Tests

```
pip install .[test]
pytest
```