"""Guns with limited magazines and timed reloads."""

from __future__ import annotations

import math

RELOAD_IMAGES = tuple(f"./resources/gun/T_Gun_Reload_{i}.png" for i in range(3))


class Gun:
    """A gun holding up to ``max_ammo`` rounds that reloads when emptied."""

    image_path = ""
    reversed_image_path = ""

    def __init__(self, max_ammo: int) -> None:
        self.max_ammo = max_ammo
        self.current_ammo = max_ammo
        self.reloading = False
        self.reload_time = 1.0
        self.reload_timer = 0.0
        self.reload_frame = 0

    def reload(self) -> None:
        """Start reloading."""
        self.reloading = True
        self.reload_timer = 0.0
        self.reload_frame = 0

    def fire_bullet(self) -> bool:
        """Spend one round; return False if the gun cannot fire."""
        if self.reloading or self.current_ammo <= 0:
            return False
        self.current_ammo -= 1
        if self.current_ammo == 0:
            self.reload()
        return True

    def is_reloading(self) -> bool:
        """Return True while a reload is in progress."""
        return self.reloading

    def update_reload(self, frame_time: float) -> None:
        """Advance the reload, refilling the magazine when it completes."""
        if not self.reloading:
            return
        self.reload_timer += frame_time
        if self.reload_timer >= self.reload_time:
            self.reloading = False
            self.current_ammo = self.max_ammo
        else:
            frames = len(RELOAD_IMAGES)
            time_per_frame = self.reload_time / frames
            self.reload_frame = int(self.reload_timer / time_per_frame) % frames

    def aim_angle(
        self,
        player_x: float,
        player_y: float,
        cursor_x: float,
        cursor_y: float,
        direction_left: bool,
    ) -> float:
        """Angle in degrees at which to draw the gun, turned when facing left."""
        angle = math.degrees(math.atan2(cursor_y - player_y, cursor_x - player_x))
        if direction_left:
            angle += 180.0
        return angle


class Revolver(Gun):
    """Five-round revolver."""

    image_path = "./resources/gun/RevolverStill.png"
    reversed_image_path = "./resources/gun/rRevolverStill.png"

    def __init__(self) -> None:
        super().__init__(5)


class HeadshotGun(Gun):
    """Seven-round headshot gun."""

    image_path = "./resources/gun/Headshot_Gun.png"
    reversed_image_path = "./resources/gun/rHeadshot_Gun.png"

    def __init__(self) -> None:
        super().__init__(7)


class ClusterGun(Gun):
    """Ten-round cluster gun."""

    image_path = "./resources/gun/Cluster_Gun.png"
    reversed_image_path = "./resources/gun/rCluster_Gun.png"

    def __init__(self) -> None:
        super().__init__(10)


class DualShotgun(Gun):
    """Four-round dual shotgun."""

    image_path = "./resources/gun/DualShotgun_Gun.png"
    reversed_image_path = "./resources/gun/rDualShotgun_Gun.png"

    def __init__(self) -> None:
        super().__init__(4)