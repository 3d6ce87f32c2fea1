"""Bullets fired by the player's guns."""

from __future__ import annotations

import math

BULLET_IMAGE = "./resources/gun/SmallCircle.png"
HIT_EFFECT_IMAGES = (
    "./resources/effect/HitImpactFX_0.png",
    "./resources/effect/HitImpactFX_1.png",
)


class Bullet:
    """A bullet travelling in a straight line towards its target."""

    hit_effect_duration = 0.25

    def __init__(
        self,
        x: float,
        y: float,
        target_x: float,
        target_y: float,
        damage: int,
        speed: float,
    ) -> None:
        dx = target_x - x
        dy = target_y - y
        distance = math.hypot(dx, dy)
        if distance == 0:
            raise ValueError("bullet target coincides with its origin")
        self.x = x
        self.y = y
        self.speed = speed
        self.damage = damage
        self.direction_x = dx / distance
        self.direction_y = dy / distance
        self.is_hit = False
        self.hit_effect_time = 0.0

    def update(self, frame_time: float) -> None:
        """Move the bullet, or advance its hit effect once it has hit."""
        if self.is_hit:
            self.hit_effect_time += frame_time
        else:
            self.x += self.direction_x * self.speed * frame_time
            self.y += self.direction_y * self.speed * frame_time

    def is_out_of_bounds(self, width: float, height: float) -> bool:
        """Return True if the bullet has left the map area."""
        return self.x < 0 or self.y < 0 or self.x > width or self.y > height

    def check_collision(
        self,
        enemy_x: float,
        enemy_y: float,
        enemy_width: float,
        enemy_height: float,
    ) -> bool:
        """Return True if the bullet lies strictly inside the enemy's box."""
        return (
            enemy_x < self.x < enemy_x + enemy_width
            and enemy_y < self.y < enemy_y + enemy_height
        )

    def is_effect_finished(self) -> bool:
        """Return True once the hit effect has played for its full duration."""
        return self.hit_effect_time >= self.hit_effect_duration

    def hit_effect_frame(self) -> int:
        """Index of the hit effect image to show, holding the last frame."""
        frames = len(HIT_EFFECT_IMAGES)
        frame = int(self.hit_effect_time / self.hit_effect_duration * frames)
        return max(0, min(frame, frames - 1))


class RevolverBullet(Bullet):
    """Bullet fired by the revolver."""

    def __init__(self, x: float, y: float, target_x: float, target_y: float) -> None:
        super().__init__(x, y, target_x, target_y, 50, 1500.0)


class HeadshotGunBullet(Bullet):
    """Bullet fired by the headshot gun."""

    def __init__(self, x: float, y: float, target_x: float, target_y: float) -> None:
        super().__init__(x, y, target_x, target_y, 100, 1500.0)


class ClusterGunBullet(Bullet):
    """Bullet fired by the cluster gun."""

    def __init__(self, x: float, y: float, target_x: float, target_y: float) -> None:
        super().__init__(x, y, target_x, target_y, 75, 1500.0)


class DualShotgunBullet(Bullet):
    """Shotgun pellet whose direction is turned by a spread angle in radians."""

    def __init__(
        self,
        x: float,
        y: float,
        target_x: float,
        target_y: float,
        spread_angle: float = 0.0,
    ) -> None:
        super().__init__(x, y, target_x, target_y, 100, 1500.0)
        cos_a = math.cos(spread_angle)
        sin_a = math.sin(spread_angle)
        dir_x, dir_y = self.direction_x, self.direction_y
        self.direction_x = dir_x * cos_a - dir_y * sin_a
        self.direction_y = dir_x * sin_a + dir_y * cos_a