"""Recommendation carousels: shuffled cover pictures shown a group at a time."""

from __future__ import annotations

import random
from collections.abc import Iterable
from dataclasses import dataclass, field

IMAGE_DIR = ":/Image/rec/"
IMAGE_COUNT = 40
TEXT_PREFIX = "推荐-"

SINGLE_ROW_COLUMNS = 4
DOUBLE_ROW_COLUMNS = 8


@dataclass(frozen=True)
class RecItem:
    """One recommended entry: a caption and a cover picture."""

    text: str
    image: str

    @property
    def style_sheet(self) -> str:
        """Style that draws the cover picture."""
        return f"border-image:url({self.image})"


def random_pictures(rng: random.Random | None = None) -> list[RecItem]:
    """All recommendation pictures in random order, captioned by position."""
    rng = rng if rng is not None else random.Random()
    names = [f"{number:03d}.png" for number in range(1, IMAGE_COUNT + 1)]
    rng.shuffle(names)
    return [
        RecItem(text=f"{TEXT_PREFIX}{position:03d}", image=IMAGE_DIR + name)
        for position, name in enumerate(names)
    ]


@dataclass
class RecBox:
    """A carousel that shows one group of items and pages through the groups.

    A one-row box shows four items per group; a two-row box shows eight,
    four in each row.
    """

    items: list[RecItem]
    rows: int = 1
    current_index: int = field(default=0, init=False)

    def __post_init__(self) -> None:
        self.items = list(self.items)
        self.rows = 2 if self.rows == 2 else 1
        if len(self.items) < self.columns:
            raise ValueError(
                f"a {self.rows}-row box needs at least {self.columns} items, "
                f"got {len(self.items)}"
            )

    @classmethod
    def from_items(cls, items: Iterable[RecItem], rows: int = 1) -> "RecBox":
        return cls(list(items), rows)

    @property
    def columns(self) -> int:
        """Number of items in one group."""
        return DOUBLE_ROW_COLUMNS if self.rows == 2 else SINGLE_ROW_COLUMNS

    @property
    def group_count(self) -> int:
        """Number of complete groups the items fill."""
        return len(self.items) // self.columns

    def current_items(self) -> list[list[RecItem]]:
        """The current group, split into its rows."""
        start = self.current_index * self.columns
        group = self.items[start : start + self.columns]
        if self.rows == 2:
            half = self.columns // 2
            return [group[:half], group[half:]]
        return [group]

    def previous(self) -> list[list[RecItem]]:
        """Step back one group, wrapping to the last; return the new group."""
        self.current_index -= 1
        if self.current_index < 0:
            self.current_index = self.group_count - 1
        return self.current_items()

    def next(self) -> list[list[RecItem]]:
        """Step forward one group, wrapping to the first; return the new group."""
        self.current_index += 1
        if self.current_index >= self.group_count:
            self.current_index = 0
        return self.current_items()