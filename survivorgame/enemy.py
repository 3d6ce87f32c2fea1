"""Enemies that chase the player, and the dashing boss."""

from __future__ import annotations

import math
from typing import Iterable, Optional, Tuple

from survivorgame.obstacle import Obstacle

DEATH_EFFECT_IMAGES = tuple(f"./resources/effect/DeathFX_{i}.png" for i in range(4))
DASH_SOUND = "./resources/sounds/dash.wav"


def _enemy_frames(name: str, count: int) -> Tuple[str, ...]:
    return tuple(f"./resources/enemy/{name}_{i}.png" for i in range(count))


def _direction_to(x: float, y: float, target_x: float, target_y: float) -> Tuple[float, float]:
    dx = target_x - x
    dy = target_y - y
    distance = math.hypot(dx, dy)
    if distance == 0:
        return 0.0, 0.0
    return dx / distance, dy / distance


class Enemy:
    """A monster that walks straight towards the player, blocked by obstacles."""

    images: Tuple[str, ...] = ()
    frame_count = 5

    def __init__(
        self,
        x: float,
        y: float,
        speed: float,
        health: int,
        animation_speed: float = 5.0,
        width: float = 50.0,
        height: float = 50.0,
    ) -> None:
        self.x = x
        self.y = y
        self.speed = speed
        self.health = health
        self.animation_speed = animation_speed
        self.width = width
        self.height = height
        self.current_frame = 0
        self.frame_time_accumulator = 0.0
        self.is_dying = False
        self.death_effect_duration = 0.5
        self.death_effect_start = 0.0

    def _advance_animation(self, frame_time: float) -> None:
        self.frame_time_accumulator += frame_time
        if self.frame_time_accumulator >= self.animation_speed:
            self.current_frame = (self.current_frame + 1) % self.frame_count
            self.frame_time_accumulator = 0.0

    def _try_move(self, new_x: float, new_y: float, obstacles: Iterable[Obstacle]) -> None:
        if not self.check_collision(new_x, new_y, obstacles):
            self.x = new_x
            self.y = new_y

    def _update_death_effect(self, frame_time: float) -> None:
        self.death_effect_start += frame_time
        if self.death_effect_start >= self.death_effect_duration:
            self.is_dying = False
            self.death_effect_start = 0.0

    def update(
        self,
        frame_time: float,
        player_x: float,
        player_y: float,
        obstacles: Iterable[Obstacle],
    ) -> None:
        """Step towards the player, or play the death effect while dying."""
        if self.is_dying:
            self._update_death_effect(frame_time)
            return

        dir_x, dir_y = _direction_to(self.x, self.y, player_x, player_y)
        self._try_move(
            self.x + dir_x * self.speed * frame_time,
            self.y + dir_y * self.speed * frame_time,
            obstacles,
        )
        self._advance_animation(frame_time)

    def update_boss(
        self,
        frame_time: float,
        player_x: float,
        player_y: float,
        obstacles: Iterable[Obstacle],
    ) -> None:
        """Boss behaviour; ordinary enemies have none."""

    def take_damage(self, damage: int) -> None:
        """Lose health; at zero the death effect starts."""
        self.health -= damage
        if self.health <= 0 and not self.is_dying:
            self.is_dying = True
            self.health = 0
            self.death_effect_start = 0.0

    def is_dead(self) -> bool:
        """Return True once health is gone and the death effect has finished."""
        return self.health <= 0 and not self.is_dying

    def check_collision(
        self, new_x: float, new_y: float, obstacles: Iterable[Obstacle]
    ) -> bool:
        """Return True if this enemy placed at the new position hits an obstacle."""
        return any(
            obstacle.intersects(new_x, new_y, self.width, self.height)
            for obstacle in obstacles
        )

    def death_effect_frame(self) -> Optional[int]:
        """Index of the death effect image to show, or None if none is shown."""
        if not self.is_dying:
            return None
        frames = len(DEATH_EFFECT_IMAGES)
        frame = int(self.death_effect_start / self.death_effect_duration * frames)
        if 0 <= frame < frames:
            return frame
        return None


class BrainMonster(Enemy):
    """Slow, weak monster."""

    images = _enemy_frames("BrainMonster", 4)
    frame_count = len(images)

    def __init__(
        self,
        x: float,
        y: float,
        speed: float,
        health: int = 50,
        width: float = 27.0,
        height: float = 36.0,
    ) -> None:
        super().__init__(x, y, 20.0, health, 0.2, width, height)


class EyeMonster(Enemy):
    """Quicker weak monster."""

    images = _enemy_frames("EyeMonster", 3)
    frame_count = len(images)

    def __init__(
        self,
        x: float,
        y: float,
        speed: float,
        health: int = 50,
        width: float = 37.0,
        height: float = 29.0,
    ) -> None:
        super().__init__(x, y, 40.0, health, 0.2, width, height)


class BigBoomer(Enemy):
    """Sturdy monster."""

    images = _enemy_frames("BigBoomer", 4)
    frame_count = len(images)

    def __init__(
        self,
        x: float,
        y: float,
        speed: float,
        health: int = 500,
        width: float = 45.0,
        height: float = 51.0,
    ) -> None:
        super().__init__(x, y, 30.0, health, 0.2, width, height)


class Lamprey(Enemy):
    """Fast, tough monster."""

    images = _enemy_frames("T_Lamprey", 5)
    frame_count = len(images)

    def __init__(
        self,
        x: float,
        y: float,
        speed: float,
        health: int = 1000,
        width: float = 50.0,
        height: float = 50.0,
    ) -> None:
        super().__init__(x, y, 40.0, health, 0.2, width, height)


class Yog(Enemy):
    """Large, very tough monster."""

    images = _enemy_frames("T_Yog", 4)
    frame_count = len(images)

    def __init__(
        self,
        x: float,
        y: float,
        speed: float,
        health: int = 2500,
        width: float = 64.0,
        height: float = 54.0,
    ) -> None:
        super().__init__(x, y, 50.0, health, 0.2, width, height)


class WingedMonster(Enemy):
    """Boss that chases the player and dashes at it periodically."""

    images = _enemy_frames("WingedMonster", 5)
    frame_count = len(images)
    dash_duration = 0.2

    def __init__(
        self,
        x: float,
        y: float,
        speed: float,
        health: int = 10000,
        width: float = 50.0,
        height: float = 50.0,
    ) -> None:
        super().__init__(x, y, 60.0, health, 0.2, width, height)
        self.is_dashing = False
        self.dash_cooldown = 1.5
        self.dash_speed = 600.0
        self.dash_timer = 0.0
        self.dash_direction_x = 0.0
        self.dash_direction_y = 0.0

    def update_boss(
        self,
        frame_time: float,
        player_x: float,
        player_y: float,
        obstacles: Iterable[Obstacle],
    ) -> None:
        """Chase the player, dashing along the chase direction after each cooldown."""
        obstacles = list(obstacles)
        self.dash_timer += frame_time

        if self.is_dying:
            self._update_death_effect(frame_time)
            return

        if self.is_dashing:
            self._try_move(
                self.x + self.dash_direction_x * self.dash_speed * frame_time,
                self.y + self.dash_direction_y * self.dash_speed * frame_time,
                obstacles,
            )
            if self.dash_timer >= self.dash_duration:
                self.is_dashing = False
                self.dash_timer = 0.0
        else:
            dir_x, dir_y = _direction_to(self.x, self.y, player_x, player_y)
            self._try_move(
                self.x + dir_x * self.speed * frame_time,
                self.y + dir_y * self.speed * frame_time,
                obstacles,
            )
            if self.dash_timer >= self.dash_cooldown:
                self.is_dashing = True
                self.dash_direction_x = dir_x
                self.dash_direction_y = dir_y
                self.dash_timer = 0.0

        self._advance_animation(frame_time)