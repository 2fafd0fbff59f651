"""LRC lyrics: parsing, timed lookup and line wrapping."""

from __future__ import annotations

import re
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from pathlib import Path

NO_LYRICS_TEXT = "当前歌曲无歌词"
WINDOW_RADIUS = 3

_INTEGER = re.compile(r"[+-]?\d+")
_BREAK_CHARS = frozenset(",-")


@dataclass(frozen=True)
class LrcLine:
    """One lyrics line and the time, in milliseconds, at which it starts."""

    time: int
    text: str


def _to_int(text: str) -> int:
    text = text.strip()
    return int(text) if _INTEGER.fullmatch(text) else 0


def parse_lrc_line(line: str) -> LrcLine:
    """Parse a line such as ``[00:17.94]text`` or ``[0:58.600.00]text``.

    Unreadable time fields count as zero; a line without a tag gets time zero
    and its whole content as text.
    """
    left = line.find("[")
    right = line.find("]")
    if left == -1 or right < left:
        return LrcLine(0, line.strip())
    tag = line[left + 1 : right]
    minutes, _, rest = tag.partition(":")
    seconds, _, rest = rest.partition(".")
    fraction = rest.split(".", 1)[0]
    time = _to_int(minutes) * 60_000 + _to_int(seconds) * 1000 + _to_int(fraction)
    return LrcLine(time, line[right + 1 :].strip())


def parse_lrc(path: str | Path) -> list[LrcLine]:
    """Parse every line of an LRC file. Raises ``OSError`` if it cannot be read."""
    with open(path, encoding="utf-8-sig", errors="replace") as lrc_file:
        return [parse_lrc_line(line) for line in lrc_file]


def wrap_text(text: str, max_width: int, measure: Callable[[str], int]) -> str:
    """Split text that is wider than ``max_width`` into two lines.

    The break goes at the separator (whitespace, comma or dash) nearest the
    middle, which is dropped; without one the text is cut in the middle.
    """
    if not text:
        return ""
    if measure(text) <= max_width:
        return text

    def is_break(char: str) -> bool:
        return char.isspace() or char in _BREAK_CHARS

    middle = len(text) // 2
    for offset in range(middle):
        for candidate in (middle - offset, middle + offset):
            if is_break(text[candidate]):
                return text[:candidate] + "\n" + text[candidate + 1 :]
    return text[:middle] + "\n" + text[middle:]


@dataclass(frozen=True)
class Lyrics:
    """Lyrics lines in playing order."""

    lines: tuple[LrcLine, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "lines", tuple(self.lines))

    @classmethod
    def load(cls, path: str | Path) -> "Lyrics":
        """Read lyrics from an LRC file."""
        return cls(tuple(parse_lrc(path)))

    def line_index(self, position: int) -> int | None:
        """Index of the line shown at ``position`` ms, or ``None`` without lyrics."""
        if not self.lines:
            return None
        if self.lines[0].time >= position:
            return 0
        for index, (before, after) in enumerate(zip(self.lines, self.lines[1:])):
            if before.time < position <= after.time:
                return index
        return len(self.lines) - 1

    def line_text(self, index: int) -> str:
        """Text of the line at ``index``, or an empty string when out of range."""
        if 0 <= index < len(self.lines):
            return self.lines[index].text
        return ""

    def window(self, position: int) -> list[str]:
        """The seven lines around the current one, the current one in the middle."""
        index = self.line_index(position)
        if index is None:
            blanks: Sequence[str] = [""] * WINDOW_RADIUS
            return [*blanks, NO_LYRICS_TEXT, *blanks]
        return [
            self.line_text(index + offset)
            for offset in range(-WINDOW_RADIUS, WINDOW_RADIUS + 1)
        ]