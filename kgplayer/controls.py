"""Player controls: volume, progress slider and page navigation."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field

VOLUME_TOP = 25
VOLUME_BOTTOM = 205
VOLUME_SPAN = VOLUME_BOTTOM - VOLUME_TOP
DEFAULT_VOLUME = 20
_DEFAULT_FILL_HEIGHT = 36


@dataclass
class VolumeControl:
    """A vertical volume slider with a mute toggle.

    Positions are y coordinates on the slider track, which runs from
    ``VOLUME_TOP`` (full volume) down to ``VOLUME_BOTTOM`` (silent).
    """

    on_mute: Callable[[bool], None] | None = None
    on_volume: Callable[[int], None] | None = None
    is_muted: bool = field(default=False, init=False)
    ratio: int = field(default=DEFAULT_VOLUME, init=False)
    level_y: int = field(default=VOLUME_BOTTOM - _DEFAULT_FILL_HEIGHT, init=False)

    @property
    def fill_height(self) -> int:
        """Height of the filled part of the track."""
        return VOLUME_BOTTOM - self.level_y

    def toggle_mute(self) -> bool:
        """Flip muting, notify the listener and return the new state."""
        self.is_muted = not self.is_muted
        if self.on_mute is not None:
            self.on_mute(self.is_muted)
        return self.is_muted

    def _set_level(self, y: int) -> int:
        self.level_y = min(max(y, VOLUME_TOP), VOLUME_BOTTOM)
        self.ratio = self.fill_height * 100 // VOLUME_SPAN
        return self.ratio

    def _emit(self) -> None:
        if self.on_volume is not None:
            self.on_volume(self.ratio)

    def press(self, y: int) -> int:
        """Move the level to ``y`` without notifying; return the new ratio."""
        return self._set_level(y)

    def move(self, y: int) -> int:
        """Move the level to ``y`` and notify; return the new ratio."""
        ratio = self._set_level(y)
        self._emit()
        return ratio

    def release(self) -> int:
        """Notify the current ratio and return it."""
        self._emit()
        return self.ratio


@dataclass
class ProgressSlider:
    """A horizontal playback progress bar driven by mouse positions."""

    max_width: int
    on_seek: Callable[[float], None] | None = None
    current_pos: int = field(default=0, init=False)
    dragging: bool = field(default=False, init=False)

    def __post_init__(self) -> None:
        if self.max_width <= 0:
            raise ValueError("slider width must be positive")

    @property
    def fill_width(self) -> int:
        """Width of the filled part of the bar."""
        return self.current_pos

    def press(self, x: int) -> int:
        """Start dragging at ``x``."""
        self.dragging = True
        self.current_pos = x
        return self.current_pos

    def move(self, x: int) -> int:
        """Follow a drag to ``x``; positions outside the bar are ignored."""
        if self.dragging and 0 <= x < self.max_width:
            self.current_pos = min(max(x, 0), self.max_width)
        return self.current_pos

    def release(self, x: int) -> float:
        """End the drag at ``x``, notify and return the position as a fraction."""
        self.dragging = False
        self.current_pos = x
        fraction = self.current_pos / self.max_width
        if self.on_seek is not None:
            self.on_seek(fraction)
        return fraction


@dataclass
class NavButton:
    """A navigation entry leading to one page."""

    icon: str
    text: str
    page_id: int
    highlighted: bool = False
    animating: bool = False


def _default_buttons() -> list[NavButton]:
    return [
        NavButton(":/Image/rec.png", "推荐", 0),
        NavButton(":/Image/radio.png", "电台", 1),
        NavButton(":/Image/music.png", "音乐馆", 2),
        NavButton(":/Image/like.png", "我喜欢", 3, animating=True),
        NavButton(":/Image/local.png", "本地下载", 4),
        NavButton(":/Image/recent.png", "最近播放", 5),
    ]


@dataclass
class NavBar:
    """The navigation buttons and the page they currently show."""

    buttons: list[NavButton] = field(default_factory=_default_buttons)
    current_page: int = 4
    on_page_changed: Callable[[int], None] | None = None

    def click(self, page_id: int) -> int:
        """Highlight the button for ``page_id`` and switch to its page.

        Raises ``KeyError`` when no button leads to that page.
        """
        if not any(button.page_id == page_id for button in self.buttons):
            raise KeyError(page_id)
        for button in self.buttons:
            button.highlighted = button.page_id == page_id
        self.current_page = page_id
        if self.on_page_changed is not None:
            self.on_page_changed(page_id)
        return page_id