"""Track list pages: the liked, local and recently played views."""

from __future__ import annotations

import enum
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path

from kgplayer.library import MusicLibrary
from kgplayer.music import Music

LikeListener = Callable[[bool, str], None]
PlayAllListener = Callable[["PageKind"], None]
PlayIndexListener = Callable[["PageKind", int], None]

DEFAULT_COVER = ":/Image/KuGou.png"


class PageKind(enum.Enum):
    """The kinds of track pages; the value is the page's type name."""

    LIKE = "我喜欢"
    LOCAL = "本地音乐"
    RECENT = "最近播放"

    def includes(self, music: Music) -> bool:
        """Whether a track is shown on a page of this kind."""
        if self is PageKind.LIKE:
            return music.is_like
        if self is PageKind.RECENT:
            return music.is_history
        return True

    def plays(self, music: Music) -> bool:
        """Whether a track goes into the play queue when this page is played."""
        return music.is_like if self is PageKind.LIKE else True


@dataclass
class ListItem:
    """One row of a page: a track's details and its like toggle."""

    music_id: str
    name: str
    singer: str
    album: str
    is_like: bool = False
    on_like_changed: Callable[[bool], None] | None = None

    @classmethod
    def from_music(cls, music: Music) -> "ListItem":
        return cls(
            music_id=music.music_id,
            name=music.name,
            singer=music.singer,
            album=music.album,
            is_like=music.is_like,
        )

    def toggle_like(self) -> bool:
        """Flip the like state, notify the listener and return the new state."""
        self.is_like = not self.is_like
        if self.on_like_changed is not None:
            self.on_like_changed(self.is_like)
        return self.is_like


@dataclass
class MusicPage:
    """A page listing the tracks of one kind from the library."""

    kind: PageKind
    title: str = ""
    cover: str = DEFAULT_COVER
    on_like_changed: LikeListener | None = None
    on_play_all: PlayAllListener | None = None
    on_play_index: PlayIndexListener | None = None
    music_ids: list[str] = field(default_factory=list, init=False)
    items: list[ListItem] = field(default_factory=list, init=False)

    def __post_init__(self) -> None:
        if not self.title:
            self.title = self.kind.value

    @property
    def type_name(self) -> str:
        return self.kind.value

    def _notify_like(self, music_id: str) -> Callable[[bool], None]:
        def notify(is_like: bool) -> None:
            if self.on_like_changed is not None:
                self.on_like_changed(is_like, music_id)

        return notify

    def refresh(self, library: MusicLibrary) -> list[ListItem]:
        """Rebuild the page's rows from the library and return them."""
        self.music_ids = [m.music_id for m in library if self.kind.includes(m)]
        self.items = []
        for music_id in self.music_ids:
            music = library.find_by_id(music_id)
            if music is None:
                continue
            item = ListItem.from_music(music)
            item.on_like_changed = self._notify_like(music_id)
            self.items.append(item)
        return self.items

    def music_id_at(self, index: int) -> str:
        """Id of the track in row ``index``. Raises ``IndexError`` if there is none."""
        if not 0 <= index < len(self.music_ids):
            raise IndexError(f"no track at row {index} of page {self.type_name}")
        return self.music_ids[index]

    def playlist_paths(self, library: MusicLibrary) -> list[Path]:
        """Paths of the tracks queued when this page is played."""
        return [m.path for m in library if self.kind.plays(m)]

    def play_all(self) -> PageKind:
        """Ask for the whole page to be played; returns the page kind."""
        if self.on_play_all is not None:
            self.on_play_all(self.kind)
        return self.kind

    def activate(self, index: int) -> tuple[PageKind, int]:
        """Ask for the track in row ``index`` to be played."""
        if self.on_play_index is not None:
            self.on_play_index(self.kind, index)
        return self.kind, index