"""Placement of enemies and obstacles, and the bullets each gun fires."""

from __future__ import annotations

import math
import random
from typing import Dict, List, Tuple

from survivorgame.bullet import (
    Bullet,
    ClusterGunBullet,
    DualShotgunBullet,
    HeadshotGunBullet,
    RevolverBullet,
)
from survivorgame.gun import ClusterGun, DualShotgun, Gun, HeadshotGun, Revolver
from survivorgame.obstacle import OBSTACLE_IMAGES, Obstacle

# Footprint of each obstacle picture, used as its collision box.
OBSTACLE_SIZES: Dict[str, Tuple[float, float]] = {
    OBSTACLE_IMAGES[0]: (32.0, 96.0),
    OBSTACLE_IMAGES[1]: (48.0, 64.0),
    OBSTACLE_IMAGES[2]: (48.0, 64.0),
    OBSTACLE_IMAGES[3]: (48.0, 64.0),
    OBSTACLE_IMAGES[4]: (48.0, 64.0),
}

CLUSTER_SECOND_TARGET_OFFSET = 10.0
SHOTGUN_PELLETS = 5
SHOTGUN_SPREAD = math.radians(10.0)
SHOTGUN_AIM_DISTANCE = 100.0


def spawn_position(
    player_x: float, player_y: float, radius: float, rng: random.Random
) -> Tuple[float, float]:
    """Pick a point on a circle around the player at a whole-degree angle."""
    angle = math.radians(rng.randrange(360))
    return player_x + radius * math.cos(angle), player_y + radius * math.sin(angle)


def create_obstacles(
    count: int, map_width: int, map_height: int, rng: random.Random
) -> List[Obstacle]:
    """Scatter ``count`` obstacles at whole-number positions inside the map."""
    if count < 0:
        raise ValueError("obstacle count must not be negative")
    if count and (map_width <= 0 or map_height <= 0):
        raise ValueError("map size must be positive to place obstacles")

    obstacles = []
    for _ in range(count):
        x = float(rng.randrange(map_width))
        y = float(rng.randrange(map_height))
        image_path = rng.choice(OBSTACLE_IMAGES)
        width, height = OBSTACLE_SIZES[image_path]
        obstacles.append(Obstacle(x, y, width, height, image_path))
    return obstacles


def bullets_for_gun(
    gun: Gun, x: float, y: float, target_x: float, target_y: float
) -> List[Bullet]:
    """Return the bullets one shot of ``gun`` produces; unknown guns fire none."""
    if isinstance(gun, Revolver):
        return [RevolverBullet(x, y, target_x, target_y)]
    if isinstance(gun, HeadshotGun):
        return [HeadshotGunBullet(x, y, target_x, target_y)]
    if isinstance(gun, ClusterGun):
        return [
            ClusterGunBullet(x, y, target_x, target_y),
            ClusterGunBullet(x, y, target_x, target_y + CLUSTER_SECOND_TARGET_OFFSET),
        ]
    if isinstance(gun, DualShotgun):
        base_angle = math.atan2(target_y - y, target_x - x)
        middle = SHOTGUN_PELLETS // 2
        pellets: List[Bullet] = []
        for i in range(SHOTGUN_PELLETS):
            angle = base_angle + SHOTGUN_SPREAD * (i - middle)
            pellets.append(
                DualShotgunBullet(
                    x,
                    y,
                    x + math.cos(angle) * SHOTGUN_AIM_DISTANCE,
                    y + math.sin(angle) * SHOTGUN_AIM_DISTANCE,
                    0.0,
                )
            )
        return pellets
    return []