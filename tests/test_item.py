import pytest

from survivorgame.item import ITEM_IMAGES, Item


@pytest.fixture
def item():
    return Item(12.0, 34.0)


def test_starts_uncollected_at_position(item):
    assert (item.x, item.y) == (12.0, 34.0)
    assert item.collected is False
    assert item.current_frame == 0


def test_short_update_keeps_frame(item):
    item.update(0.1)
    assert item.current_frame == 0
    assert item.animation_time == pytest.approx(0.1)


def test_switch_time_advances_frame_and_resets_timer(item):
    item.update(Item.switch_time)
    assert item.current_frame == 1
    assert item.animation_time == 0.0


def test_animation_wraps_around(item):
    for _ in range(len(ITEM_IMAGES)):
        item.update(Item.switch_time)
    assert item.current_frame == 0


def test_switch_time_matches_source(item):
    assert item.switch_time == 0.25


def test_collect_marks_item(item):
    item.collect()
    assert item.collected is True