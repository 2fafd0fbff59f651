"""The collection of tracks the player knows about."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from pathlib import Path

from kgplayer.music import Music

_AUDIO_SUFFIXES = frozenset({".mp3", ".mpga", ".flac"})


def is_audio_file(path: str | Path) -> bool:
    """Whether the path names an MPEG audio or FLAC file."""
    return Path(path).suffix.lower() in _AUDIO_SUFFIXES


class MusicLibrary:
    """An ordered collection of tracks."""

    def __init__(self, tracks: Iterable[Music] = ()) -> None:
        self._tracks: list[Music] = list(tracks)

    def add_files(self, paths: Iterable[str | Path]) -> list[Music]:
        """Add every audio file among ``paths``; return the tracks added."""
        added = [Music.from_path(path) for path in paths if is_audio_file(path)]
        self._tracks.extend(added)
        return added

    def add(self, music: Music) -> None:
        """Append a track."""
        self._tracks.append(music)

    def find_by_id(self, music_id: str) -> Music | None:
        """The track with this id, or ``None``."""
        return next((m for m in self._tracks if m.music_id == music_id), None)

    def find_by_path(self, path: str | Path) -> Music | None:
        """The first track stored at this path, or ``None``."""
        path = Path(path)
        return next((m for m in self._tracks if m.path == path), None)

    def __iter__(self) -> Iterator[Music]:
        return iter(self._tracks)

    def __len__(self) -> int:
        return len(self._tracks)