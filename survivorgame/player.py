"""The player character: movement, health, experience and levelling."""

from __future__ import annotations

from typing import Callable, Iterable, Optional

from survivorgame.obstacle import Obstacle

PLAYER_WIDTH = 20.0
PLAYER_HEIGHT = 25.0

IDLE_FRAMES = 5
RUN_FRAMES = 4
HEART_FRAMES = 3

IDLE_IMAGES = tuple(f"./resources/player/Idle_{i}.png" for i in range(IDLE_FRAMES))
RUN_IMAGES = tuple(f"./resources/player/Run_{i}.png" for i in range(RUN_FRAMES))
REVERSED_IDLE_IMAGES = tuple(
    f"./resources/player/rIdle_{i}.png" for i in range(IDLE_FRAMES)
)
REVERSED_RUN_IMAGES = tuple(
    f"./resources/player/rRun_{i}.png" for i in range(RUN_FRAMES)
)
LEVEL_UP_EFFECT_IMAGES = tuple(
    f"./resources/effect/T_LevelUpFX_{i}.png" for i in range(9)
)
HEART_IMAGES = tuple(f"./resources/ui/HeartAnimation_{i}.png" for i in range(4))

OBTAIN_POINTS_SOUND = "./resources/sounds/Obtain_Points.wav"
LEVEL_UP_SOUND = "./resources/sounds/LevelUp.wav"
HURT_SOUND = "./resources/sounds/hurt.wav"


class Player:
    """The character controlled by the user."""

    level_up_effect_duration = 1.5
    heart_animation_speed = 0.2

    def __init__(
        self,
        x: float,
        y: float,
        speed: float,
        animation_speed: float,
        on_level_up: Optional[Callable[[], None]] = None,
    ) -> None:
        self.x = x
        self.y = y
        self.speed = speed
        self.animation_speed = animation_speed
        self.on_level_up = on_level_up

        self.current_frame = 0
        self.frame_time_accumulator = 0.0
        self.move_left = False
        self.move_right = False
        self.move_up = False
        self.move_down = False
        self.is_moving = False
        self.direction_left = False

        self.bound_width = 0.0
        self.bound_height = 0.0

        self.level = 1
        self.experience = 0
        self.experience_to_next_level = 100
        self.level_up_effect_time = 0.0

        self.health = 4
        self.max_health = 4
        self.invincibility_time = 2.0
        self.current_invincibility_time = 0.0

        self.heart_animation_frame = 0
        self.heart_animation_accumulator = 0.0

    def update(self, frame_time: float, obstacles: Iterable[Obstacle]) -> None:
        """Advance timers and animation, then move according to the held keys."""
        obstacles = list(obstacles)
        self.frame_time_accumulator += frame_time
        self.level_up_effect_time -= frame_time
        self.update_invincibility(frame_time)

        if self.frame_time_accumulator >= self.animation_speed:
            frames = RUN_FRAMES if self.is_moving else IDLE_FRAMES
            self.current_frame = (self.current_frame + 1) % frames
            self.frame_time_accumulator = 0.0

        steps = (
            (self.move_left, -self.speed, 0.0),
            (self.move_right, self.speed, 0.0),
            (self.move_up, 0.0, -self.speed),
            (self.move_down, 0.0, self.speed),
        )
        self.is_moving = False
        for held, dx, dy in steps:
            if held:
                self.move(dx, dy, obstacles)
                self.is_moving = True

    def move(self, dx: float, dy: float, obstacles: Iterable[Obstacle]) -> None:
        """Move by the given step unless blocked, then keep inside the bounds."""
        new_x = self.x + dx
        new_y = self.y + dy
        if not self.check_collision(new_x, new_y, obstacles):
            self.x = new_x
            self.y = new_y

        self.x = max(self.x, 0.0)
        self.y = max(self.y, 0.0)
        if self.x > self.bound_width - PLAYER_WIDTH:
            self.x = self.bound_width - PLAYER_WIDTH * 2
        if self.y > self.bound_height - PLAYER_HEIGHT:
            self.y = self.bound_height - PLAYER_HEIGHT * 2

    def check_collision(
        self, new_x: float, new_y: float, obstacles: Iterable[Obstacle]
    ) -> bool:
        """Return True if the player placed at the new position hits an obstacle."""
        return any(
            obstacle.intersects(new_x, new_y, PLAYER_WIDTH, PLAYER_HEIGHT)
            for obstacle in obstacles
        )

    def set_bounds(self, width: float, height: float) -> None:
        """Set the size of the area the player may walk in."""
        self.bound_width = width
        self.bound_height = height

    def add_experience(self, amount: int) -> None:
        """Gain experience, levelling up as many times as it allows."""
        self.experience += amount
        while self.experience >= self.experience_to_next_level:
            self.experience -= self.experience_to_next_level
            self.level_up()

    def level_up(self) -> None:
        """Raise the level, the next requirement and start the level-up effect."""
        self.level += 1
        self.experience_to_next_level = int(self.experience_to_next_level * 1.5)
        self.level_up_effect_time = self.level_up_effect_duration
        if self.on_level_up is not None:
            self.on_level_up()

    def take_damage(self, amount: int) -> None:
        """Lose health unless invincible; a hit grants a spell of invincibility."""
        if self.is_invincible():
            return
        self.health = max(self.health - amount, 0)
        self.current_invincibility_time = self.invincibility_time

    def is_invincible(self) -> bool:
        """Return True while the player cannot be hurt."""
        return self.current_invincibility_time > 0

    def update_invincibility(self, frame_time: float) -> None:
        """Count down the remaining invincibility."""
        if self.current_invincibility_time > 0:
            self.current_invincibility_time = max(
                self.current_invincibility_time - frame_time, 0.0
            )

    def apply_upgrade(self, upgrade: str) -> None:
        """Apply an upgrade named by its panel text."""
        if upgrade == "MaxHp +1":
            self.max_health += 1
            self.health += 1
        elif upgrade == "Add Speed":
            self.speed += 0.5

    def advance_heart_animation(self) -> int:
        """Step the heart animation and return the frame to show for full hearts."""
        self.heart_animation_accumulator += self.heart_animation_speed
        if self.heart_animation_accumulator >= 1.0:
            self.heart_animation_frame = (self.heart_animation_frame + 1) % HEART_FRAMES
            self.heart_animation_accumulator = 0.0
        return self.heart_animation_frame

    def experience_fraction(self) -> float:
        """Share of the experience needed for the next level already gained."""
        return self.experience / self.experience_to_next_level

    def level_up_effect_frame(self) -> Optional[int]:
        """Index of the level-up effect image to show, or None if none is shown."""
        if self.level_up_effect_time <= 0:
            return None
        frames = len(LEVEL_UP_EFFECT_IMAGES)
        elapsed = self.level_up_effect_duration - self.level_up_effect_time
        frame = int(elapsed / self.level_up_effect_duration * frames)
        if 0 <= frame < frames:
            return frame
        return None