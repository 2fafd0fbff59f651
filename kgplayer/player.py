"""The player: playlist, play modes and coordination between pages."""

from __future__ import annotations

import enum
import random
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from pathlib import Path

from kgplayer.controls import DEFAULT_VOLUME, NavBar, VolumeControl
from kgplayer.library import MusicLibrary
from kgplayer.lyrics import Lyrics
from kgplayer.music import Music
from kgplayer.pages import MusicPage, PageKind
from kgplayer.recommend import RecBox, random_pictures

PLAYING_ICON = ":/Image/stop.png"
PAUSED_ICON = ":/Image/musicstop.png"
LOCAL_PAGE_ID = 4


def format_time(milliseconds: int) -> str:
    """Format a duration in milliseconds as zero-padded ``MM:SS``."""
    seconds = milliseconds // 1000
    return f"{seconds // 60:02d}:{seconds % 60:02d}"


class PlaybackMode(enum.Enum):
    """How the playlist moves from one track to the next."""

    LOOP = "loop"
    RANDOM = "random"
    CURRENT_ITEM_IN_LOOP = "current_item_in_loop"

    @property
    def icon(self) -> str:
        return {
            PlaybackMode.LOOP: ":/Image/listSong.png",
            PlaybackMode.RANDOM: ":/Image/shuffle.png",
            PlaybackMode.CURRENT_ITEM_IN_LOOP: ":/Image/oneSong.png",
        }[self]

    @property
    def following(self) -> "PlaybackMode":
        """The mode a click on the mode button switches to."""
        return {
            PlaybackMode.LOOP: PlaybackMode.RANDOM,
            PlaybackMode.RANDOM: PlaybackMode.CURRENT_ITEM_IN_LOOP,
            PlaybackMode.CURRENT_ITEM_IN_LOOP: PlaybackMode.LOOP,
        }[self]

    @property
    def tooltip(self) -> str:
        return {
            PlaybackMode.LOOP: "列表循环",
            PlaybackMode.RANDOM: "随机播放",
            PlaybackMode.CURRENT_ITEM_IN_LOOP: "单曲循环",
        }[self]


class PlayState(enum.Enum):
    STOPPED = "stopped"
    PLAYING = "playing"
    PAUSED = "paused"


@dataclass
class Playlist:
    """Queued track paths and the position of the current one."""

    mode: PlaybackMode = PlaybackMode.RANDOM
    rng: random.Random = field(default_factory=random.Random)
    on_current_index_changed: Callable[[int], None] | None = None
    paths: list[Path] = field(default_factory=list, init=False)
    current_index: int = field(default=-1, init=False)

    def __len__(self) -> int:
        return len(self.paths)

    def media(self, index: int) -> Path | None:
        """The path queued at ``index``, or ``None``."""
        if 0 <= index < len(self.paths):
            return self.paths[index]
        return None

    def add(self, path: str | Path) -> None:
        self.paths.append(Path(path))

    def clear(self) -> None:
        self.paths.clear()
        self.set_current_index(-1)

    def set_current_index(self, index: int) -> int:
        """Make ``index`` current; an invalid index clears the current track."""
        if not 0 <= index < len(self.paths):
            index = -1
        if index != self.current_index:
            self.current_index = index
            if self.on_current_index_changed is not None:
                self.on_current_index_changed(index)
        return self.current_index

    def _step(self, forward: bool) -> int:
        size = len(self.paths)
        if size == 0:
            return -1
        if self.mode is PlaybackMode.RANDOM:
            return self.rng.randrange(size)
        if self.mode is PlaybackMode.CURRENT_ITEM_IN_LOOP:
            if self.current_index != -1:
                return self.current_index
            return 0 if forward else size - 1
        if self.current_index == -1:
            return 0 if forward else size - 1
        return (self.current_index + (1 if forward else -1)) % size

    def next(self) -> int:
        """Move to the next track according to the mode."""
        return self.set_current_index(self._step(forward=True))

    def previous(self) -> int:
        """Move to the previous track according to the mode."""
        return self.set_current_index(self._step(forward=False))


class MusicPlayer:
    """The application state: library, pages, playlist and playback."""

    def __init__(
        self,
        library: MusicLibrary | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.library = library if library is not None else MusicLibrary()
        self.state = PlayState.STOPPED
        self.volume = DEFAULT_VOLUME
        self.muted = False
        self.now_type = PageKind.LOCAL
        self.current_music: Music | None = None
        self.lyrics = Lyrics()
        self.lyric_lines: list[str] = []
        self.current_time = format_time(0)
        self.total_time = format_time(0)
        self.mode_tooltip = ""

        self.playlist = Playlist(rng=self.rng)
        self.playlist.on_current_index_changed = self.on_current_index_changed

        self.pages = {
            kind: MusicPage(
                kind,
                on_like_changed=self.update_like,
                on_play_all=lambda k: self.play_page(k, 0),
                on_play_index=self.play_page,
            )
            for kind in PageKind
        }
        self.nav = NavBar()
        self.volume_control = VolumeControl(
            on_mute=self.set_muted, on_volume=self.set_volume
        )
        self.rec_box = RecBox(random_pictures(self.rng), 1)
        self.supply_box = RecBox(random_pictures(self.rng), 2)

    @property
    def play_icon(self) -> str:
        return PLAYING_ICON if self.state is PlayState.PLAYING else PAUSED_ICON

    @property
    def mode(self) -> PlaybackMode:
        return self.playlist.mode

    @property
    def now_playing(self) -> tuple[str, str]:
        """Title and singer of the current track, empty when nothing plays."""
        if self.current_music is None:
            return "", ""
        return self.current_music.name, self.current_music.singer

    def toggle_play(self) -> PlayState:
        """Pause while playing, otherwise start playing."""
        if self.state is PlayState.PLAYING:
            self.state = PlayState.PAUSED
        else:
            self.state = PlayState.PLAYING
        return self.state

    def cycle_mode(self) -> PlaybackMode:
        """Switch to the next playback mode and return it."""
        new_mode = self.playlist.mode.following
        self.mode_tooltip = new_mode.tooltip
        self.playlist.mode = new_mode
        return new_mode

    def play_next(self) -> int:
        return self.playlist.next()

    def play_previous(self) -> int:
        return self.playlist.previous()

    def _refresh_pages(self) -> None:
        for page in self.pages.values():
            page.refresh(self.library)

    def play_page(self, kind: PageKind | str, index: int) -> int:
        """Queue the tracks of a page and start playing at ``index``."""
        kind = PageKind(kind)
        self.playlist.clear()
        self.now_type = kind
        for path in self.pages[kind].playlist_paths(self.library):
            self.playlist.add(path)
        self.playlist.set_current_index(index)
        self.state = PlayState.PLAYING
        return self.playlist.current_index

    def update_like(self, is_like: bool, music_id: str) -> Music | None:
        """Set a track's like flag and refresh every page."""
        music = self.library.find_by_id(music_id)
        if music is not None:
            music.is_like = is_like
        self._refresh_pages()
        return music

    def add_local_files(self, paths: Iterable[str | Path]) -> list[Music]:
        """Add audio files to the library, show and queue them on the local page."""
        self.nav.current_page = LOCAL_PAGE_ID
        added = self.library.add_files(paths)
        local = self.pages[PageKind.LOCAL]
        local.refresh(self.library)
        for path in local.playlist_paths(self.library):
            self.playlist.add(path)
        return added

    def _load_lyrics(self) -> None:
        self.lyrics = Lyrics()
        if self.current_music is None:
            return
        lrc_path = self.current_music.lrc_file_path()
        if lrc_path is None:
            return
        try:
            self.lyrics = Lyrics.load(lrc_path)
        except OSError:
            self.lyrics = Lyrics()

    def on_current_index_changed(self, index: int) -> Music | None:
        """Record the newly current track in the history and load its lyrics."""
        if index < 0:
            return None
        path = self.playlist.media(index)
        if path is None:
            return None
        self.current_music = self.library.find_by_path(path)
        if self.current_music is not None:
            self.current_music.is_history = True
        self.pages[PageKind.RECENT].refresh(self.library)
        self._load_lyrics()
        return self.current_music

    def on_position_changed(self, position: int) -> list[str] | None:
        """Update the elapsed time and return the lyrics around ``position``."""
        self.current_time = format_time(position)
        if self.current_music is None:
            return None
        self.lyric_lines = self.lyrics.window(position)
        return self.lyric_lines

    def on_duration_changed(self, duration: int) -> str:
        self.total_time = format_time(duration)
        return self.total_time

    def set_volume(self, volume: int) -> int:
        self.volume = volume
        return self.volume

    def set_muted(self, muted: bool) -> bool:
        self.muted = muted
        return self.muted