import pytest

from kgplayer.controls import (
    VOLUME_BOTTOM,
    VOLUME_TOP,
    NavBar,
    NavButton,
    ProgressSlider,
    VolumeControl,
)


def test_volume_defaults():
    control = VolumeControl()
    assert control.ratio == 20
    assert control.is_muted is False
    assert control.fill_height == 36


def test_toggle_mute_notifies():
    seen = []
    control = VolumeControl(on_mute=seen.append)
    assert control.toggle_mute() is True
    assert control.toggle_mute() is False
    assert seen == [True, False]


def test_volume_extremes():
    control = VolumeControl()
    assert control.press(VOLUME_TOP) == 100
    assert control.press(VOLUME_BOTTOM) == 0


def test_volume_clamps_outside_track():
    control = VolumeControl()
    assert control.press(VOLUME_TOP - 50) == control.press(VOLUME_TOP)
    assert control.level_y == VOLUME_TOP
    assert control.press(VOLUME_BOTTOM + 50) == control.press(VOLUME_BOTTOM)
    assert control.level_y == VOLUME_BOTTOM


def test_volume_midpoint():
    control = VolumeControl()
    assert control.press((VOLUME_TOP + VOLUME_BOTTOM) // 2) == 50


def test_volume_monotonic():
    control = VolumeControl()
    ratios = [control.press(y) for y in range(VOLUME_TOP, VOLUME_BOTTOM + 1)]
    assert ratios == sorted(ratios, reverse=True)


def test_press_does_not_notify_move_and_release_do():
    seen = []
    control = VolumeControl(on_volume=seen.append)
    control.press(VOLUME_TOP)
    assert seen == []
    control.move(VOLUME_BOTTOM)
    control.release()
    assert seen == [0, 0]


def test_slider_press_release_fraction():
    seen = []
    slider = ProgressSlider(max_width=200, on_seek=seen.append)
    slider.press(50)
    assert slider.release(100) == 100 / 200
    assert seen == [100 / 200]
    assert slider.fill_width == 100


def test_slider_move_only_while_dragging():
    slider = ProgressSlider(max_width=200)
    assert slider.move(80) == 0
    slider.press(10)
    assert slider.move(80) == 80


def test_slider_move_outside_ignored():
    slider = ProgressSlider(max_width=200)
    slider.press(30)
    assert slider.move(-5) == 30
    assert slider.move(200) == 30


def test_slider_rejects_zero_width():
    with pytest.raises(ValueError):
        ProgressSlider(max_width=0)


def test_navbar_defaults():
    bar = NavBar()
    assert bar.current_page == 4
    assert [b.page_id for b in bar.buttons] == [0, 1, 2, 3, 4, 5]
    assert [b.text for b in bar.buttons if b.animating] == ["我喜欢"]


def test_navbar_click_highlights_only_target():
    pages = []
    bar = NavBar(on_page_changed=pages.append)
    assert bar.click(2) == 2
    assert bar.current_page == 2
    assert [b.page_id for b in bar.buttons if b.highlighted] == [2]
    bar.click(5)
    assert [b.page_id for b in bar.buttons if b.highlighted] == [5]
    assert pages == [2, 5]


def test_navbar_unknown_page():
    bar = NavBar(buttons=[NavButton("icon", "text", 0)], current_page=0)
    with pytest.raises(KeyError):
        bar.click(9)
    assert bar.current_page == 0