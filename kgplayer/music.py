"""Music tracks: file-name metadata and lyrics file lookup."""

from __future__ import annotations

import fnmatch
import re
import uuid
from dataclasses import dataclass, field
from pathlib import Path

UNKNOWN_SINGER = "未知歌手"
UNKNOWN_ALBUM = "未知专辑"

_KEYWORD_SEPARATOR = re.compile(r"[\s-]+")
_MIN_KEYWORD_LENGTH = 2


def parse_filename(filename: str | Path) -> tuple[str, str, str]:
    """Derive ``(title, singer, album)`` from a name like ``"Title - Singer.mp3"``.

    The title is the text before the first ``-`` (or before the first ``.``
    when there is no dash); the singer is the text between the dash and the
    first dot. Names without a dash get an unknown singer and no album.
    """
    name = Path(filename).name
    dash = name.find("-")
    dot = name.find(".")
    if dash != -1:
        title = name[:dash].strip()
        singer = (name[dash + 1 : dot] if dot > dash else name[dash + 1 :]).strip()
        album = UNKNOWN_ALBUM
    else:
        title = (name[:dot] if dot != -1 else name).strip()
        singer = UNKNOWN_SINGER
        album = ""
    return title, singer, album


def _base_name(path: Path) -> str:
    """File name up to its first dot."""
    return path.name.split(".", 1)[0]


def _matches(name: str, pattern: str) -> bool:
    return fnmatch.fnmatchcase(name.casefold(), pattern.casefold())


def find_lyrics_file(music_path: str | Path) -> Path | None:
    """Find the ``.lrc`` file belonging to a music file in the same directory.

    Tries, in order: an ``.lrc`` file whose name contains every keyword of the
    music file's base name (case-insensitive), an ``.lrc`` file whose name
    starts with the base name, and finally ``<base>.lrc``. Returns ``None``
    when nothing is found.
    """
    music_path = Path(music_path)
    directory = music_path.parent
    base = _base_name(music_path)

    try:
        file_names = sorted(
            (entry.name for entry in directory.iterdir() if entry.is_file()),
            key=str.casefold,
        )
    except OSError:
        file_names = []

    keywords = [
        word.casefold()
        for word in _KEYWORD_SEPARATOR.split(base)
        if len(word) >= _MIN_KEYWORD_LENGTH
    ]
    if keywords:
        for name in file_names:
            if not _matches(name, "*.lrc"):
                continue
            folded = name.casefold()
            if all(keyword in folded for keyword in keywords):
                return directory / name

    prefixed = [name for name in file_names if _matches(name, base + "*.lrc")]
    if prefixed:
        return directory / prefixed[0]

    exact = directory / (base + ".lrc")
    if exact.exists():
        return exact
    return None


@dataclass
class Music:
    """A track in the library."""

    path: Path
    name: str = ""
    singer: str = ""
    album: str = ""
    duration: int = 0
    is_like: bool = False
    is_history: bool = False
    music_id: str = field(default_factory=lambda: str(uuid.uuid4()))

    def __post_init__(self) -> None:
        self.path = Path(self.path)

    @classmethod
    def from_path(cls, path: str | Path) -> "Music":
        """Create a track whose title, singer and album come from its file name."""
        path = Path(path)
        name, singer, album = parse_filename(path.name)
        return cls(path=path, name=name, singer=singer, album=album)

    def lrc_file_path(self) -> Path | None:
        """Path of this track's lyrics file, or ``None``."""
        return find_lyrics_file(self.path)