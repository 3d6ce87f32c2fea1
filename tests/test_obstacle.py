import pytest

from survivorgame.obstacle import OBSTACLE_IMAGES, Obstacle


@pytest.fixture
def obstacle():
    return Obstacle(10.0, 20.0, 30.0, 40.0)


def test_overlapping_box_intersects(obstacle):
    assert obstacle.intersects(15.0, 25.0, 5.0, 5.0) is True


def test_box_containing_obstacle_intersects(obstacle):
    assert obstacle.intersects(0.0, 0.0, 1000.0, 1000.0) is True


def test_box_touching_right_edge_does_not_intersect(obstacle):
    assert obstacle.intersects(obstacle.x + obstacle.width, obstacle.y, 5.0, 5.0) is False


def test_box_touching_left_edge_does_not_intersect(obstacle):
    assert obstacle.intersects(obstacle.x - 5.0, obstacle.y, 5.0, 5.0) is False


def test_box_touching_bottom_edge_does_not_intersect(obstacle):
    assert obstacle.intersects(obstacle.x, obstacle.y + obstacle.height, 5.0, 5.0) is False


def test_far_box_does_not_intersect(obstacle):
    assert obstacle.intersects(500.0, 500.0, 5.0, 5.0) is False


def test_default_image_is_first_of_catalogue(obstacle):
    assert obstacle.image_path == OBSTACLE_IMAGES[0]
    assert "./resources/background/Tree_3.png" in OBSTACLE_IMAGES