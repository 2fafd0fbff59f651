from pathlib import Path

import pytest

from kgplayer.library import MusicLibrary
from kgplayer.music import Music
from kgplayer.pages import ListItem, MusicPage, PageKind


@pytest.fixture
def library():
    return MusicLibrary(
        [
            Music(path="a.mp3", name="A", singer="SA", album="AA", is_like=True),
            Music(path="b.mp3", name="B", singer="SB", album="AB", is_history=True),
            Music(path="c.flac", name="C", singer="SC", album="AC", is_like=True,
                  is_history=True),
            Music(path="d.mp3", name="D", singer="SD", album="AD"),
        ]
    )


def test_type_names_match_page_titles():
    assert PageKind.LIKE.value == "我喜欢"
    assert PageKind.LOCAL.value == "本地音乐"
    assert PageKind.RECENT.value == "最近播放"
    assert MusicPage(PageKind.LIKE).title == PageKind.LIKE.value


def test_like_page_shows_liked_tracks(library):
    page = MusicPage(PageKind.LIKE)
    items = page.refresh(library)
    assert [i.name for i in items] == ["A", "C"]
    assert all(i.is_like for i in items)


def test_local_page_shows_all_tracks(library):
    page = MusicPage(PageKind.LOCAL)
    items = page.refresh(library)
    assert [i.music_id for i in items] == [m.music_id for m in library]


def test_recent_page_shows_history(library):
    page = MusicPage(PageKind.RECENT)
    items = page.refresh(library)
    assert [(i.name, i.singer, i.album) for i in items] == [
        ("B", "SB", "AB"),
        ("C", "SC", "AC"),
    ]


def test_refresh_replaces_old_rows(library):
    page = MusicPage(PageKind.LIKE)
    page.refresh(library)
    for music in library:
        music.is_like = False
    assert page.refresh(library) == []
    assert page.music_ids == []


def test_music_id_at(library):
    page = MusicPage(PageKind.LIKE)
    page.refresh(library)
    ids = [m.music_id for m in library if m.is_like]
    assert page.music_id_at(0) == ids[0]
    assert page.music_id_at(1) == ids[1]


@pytest.mark.parametrize("index", [2, 10, -1])
def test_music_id_at_out_of_range(library, index):
    page = MusicPage(PageKind.LIKE)
    page.refresh(library)
    with pytest.raises(IndexError):
        page.music_id_at(index)


def test_playlist_paths_like_only_liked(library):
    page = MusicPage(PageKind.LIKE)
    assert page.playlist_paths(library) == [Path("a.mp3"), Path("c.flac")]


@pytest.mark.parametrize("kind", [PageKind.LOCAL, PageKind.RECENT])
def test_playlist_paths_other_pages_queue_everything(library, kind):
    page = MusicPage(kind)
    assert page.playlist_paths(library) == [m.path for m in library]


def test_toggle_like_notifies_page_listener(library):
    calls = []
    page = MusicPage(PageKind.LOCAL, on_like_changed=lambda like, mid: calls.append((like, mid)))
    items = page.refresh(library)
    last = items[-1]
    assert last.toggle_like() is True
    assert last.toggle_like() is False
    assert calls == [(True, last.music_id), (False, last.music_id)]


def test_list_item_toggle_without_listener():
    item = ListItem(music_id="x", name="n", singer="s", album="a", is_like=True)
    assert item.toggle_like() is False
    assert item.is_like is False


def test_play_all_notifies_listener():
    seen = []
    page = MusicPage(PageKind.RECENT, on_play_all=seen.append)
    assert page.play_all() is PageKind.RECENT
    assert seen == [PageKind.RECENT]


def test_activate_notifies_listener():
    seen = []
    page = MusicPage(PageKind.LIKE, on_play_index=lambda k, i: seen.append((k, i)))
    assert page.activate(3) == (PageKind.LIKE, 3)
    assert seen == [(PageKind.LIKE, 3)]


def test_items_are_snapshots_of_library(library):
    page = MusicPage(PageKind.LOCAL)
    items = page.refresh(library)
    items[0].toggle_like()
    assert next(iter(library)).is_like is True
    assert items[0].is_like is False