import random

import pytest

from kgplayer.recommend import RecBox, RecItem, random_pictures


def _items(count):
    return [RecItem(text=f"t{i}", image=f"img{i}") for i in range(count)]


def test_random_pictures_covers_all_images():
    items = random_pictures(random.Random(1))
    assert len(items) == 40
    assert {item.image for item in items} == {
        f":/Image/rec/{n:03d}.png" for n in range(1, 41)
    }


def test_random_pictures_captions_follow_position():
    items = random_pictures(random.Random(2))
    assert items[0].text == "推荐-000"
    assert [item.text for item in items] == sorted(item.text for item in items)


def test_random_pictures_is_reproducible_with_seed():
    first = random_pictures(random.Random(7))
    second = random_pictures(random.Random(7))
    assert [item.image for item in first] == [item.image for item in second]
    assert [item.text for item in first] == [f"推荐-{i:03d}" for i in range(40)]


def test_random_pictures_order_depends_on_seed():
    first = [item.image for item in random_pictures(random.Random(7))]
    other = [item.image for item in random_pictures(random.Random(8))]
    assert sorted(first) == sorted(other)
    assert first != other


def test_style_sheet():
    item = RecItem(text="x", image=":/Image/rec/001.png")
    assert item.style_sheet == "border-image:url(:/Image/rec/001.png)"


def test_single_row_shows_four():
    items = _items(40)
    box = RecBox(items)
    assert box.current_items() == [items[:4]]
    assert box.group_count == 10


def test_single_row_next_and_wrap():
    items = _items(40)
    box = RecBox(items)
    assert box.next() == [items[4:8]]
    box.current_index = box.group_count - 1
    assert box.next() == [items[:4]]
    assert box.current_index == 0


def test_previous_wraps_to_last_group():
    items = _items(40)
    box = RecBox(items)
    assert box.previous() == [items[36:40]]
    assert box.current_index == box.group_count - 1


def test_two_rows_split_group():
    items = _items(40)
    box = RecBox(items, rows=2)
    assert box.columns == 8
    assert box.current_items() == [items[:4], items[4:8]]
    assert box.next() == [items[8:12], items[12:16]]


def test_two_rows_full_cycle_returns_to_start():
    items = _items(40)
    box = RecBox(items, rows=2)
    start = box.current_items()
    for _ in range(box.group_count):
        box.next()
    assert box.current_items() == start


def test_other_row_counts_mean_one_row():
    box = RecBox(_items(8), rows=3)
    assert box.rows == 1
    assert len(box.current_items()) == 1


def test_too_few_items_rejected():
    with pytest.raises(ValueError):
        RecBox(_items(3))
    with pytest.raises(ValueError):
        RecBox(_items(7), rows=2)