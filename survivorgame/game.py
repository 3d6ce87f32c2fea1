"""The game loop state: menus, spawning, combat and upgrades."""

from __future__ import annotations

import random
from enum import IntEnum
from typing import List, Optional, Type

from survivorgame.bullet import Bullet
from survivorgame.camera import Camera
from survivorgame.enemy import (
    BigBoomer,
    BrainMonster,
    Enemy,
    EyeMonster,
    Lamprey,
    WingedMonster,
    Yog,
)
from survivorgame.gun import ClusterGun, DualShotgun, Gun, HeadshotGun, Revolver
from survivorgame.item import Item
from survivorgame.obstacle import Obstacle
from survivorgame.player import PLAYER_HEIGHT, PLAYER_WIDTH, Player
from survivorgame.spawning import bullets_for_gun, create_obstacles, spawn_position

SCREEN_WIDTH = 800
SCREEN_HEIGHT = 600
DEFAULT_MAP_WIDTH = 2400
DEFAULT_MAP_HEIGHT = 1800

PLAYER_SPEED = 2.0
PLAYER_ANIMATION_SPEED = 0.2

SPAWN_RADIUS = 600.0
BOSS_SPAWN_RADIUS = 100.0
ENEMY_DEFAULT_SPEED = 5.0
START_OBSTACLES = 100

ENEMY_SPAWN_INTERVAL = 10.0
BIG_BOOMER_SPAWN_INTERVAL = 30.0
LAMPREY_SPAWN_INTERVAL = 45.0
YOG_SPAWN_INTERVAL = 60.0

ITEM_EXPERIENCE = 10
CLICK_IMAGE_TIME = 0.2
SPEED_UPGRADE = 0.3

MAIN_MENU_ITEMS = 2
PAUSE_MENU_ITEMS = 3


class UpgradeOption(IntEnum):
    """Upgrades offered on level-up."""

    MAX_HP = 0
    MAX_AMMO = 1
    ADD_SPEED = 2
    UPGRADE_GUN = 3


_UPGRADE_TEXT = {
    UpgradeOption.MAX_HP: "MaxHp +1",
    UpgradeOption.MAX_AMMO: "Max Ammo +1",
    UpgradeOption.ADD_SPEED: "Add Speed",
    UpgradeOption.UPGRADE_GUN: "Upgrade Gun",
}


def upgrade_option_text(option) -> str:
    """Panel text describing an upgrade option."""
    try:
        return _UPGRADE_TEXT[UpgradeOption(option)]
    except ValueError:
        return "Unknown"


def _normalise_key(key: str) -> str:
    return key.upper() if len(key) == 1 else key.lower()


class GameFramework:
    """Holds the whole game state and reacts to time and input."""

    def __init__(
        self,
        map_width: int = DEFAULT_MAP_WIDTH,
        map_height: int = DEFAULT_MAP_HEIGHT,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.map_width = map_width
        self.map_height = map_height
        self.rng = rng if rng is not None else random.Random()

        self.revolver = Revolver()
        self.headshot_gun = HeadshotGun()
        self.cluster_gun = ClusterGun()
        self.dual_shotgun = DualShotgun()
        self.current_gun: Gun = self.revolver

        self.camera = Camera(SCREEN_WIDTH, SCREEN_HEIGHT)
        self.camera.set_bounds(map_width, map_height)
        self.player = self._new_player()

        self.enemies: List[Enemy] = []
        self.obstacles: List[Obstacle] = []
        self.bullets: List[Bullet] = []
        self.items: List[Item] = []

        self.show_click_image = False
        self.click_image_timer = 0.0
        self.cursor_x = 0
        self.cursor_y = 0

        self.enemy_spawn_timer = 0.0
        self.big_boomer_spawn_timer = 0.0
        self.lamprey_spawn_timer = 0.0
        self.yog_spawn_timer = 0.0

        self.frame_time = 0.0
        self.game_time_seconds = 0
        self._time_accumulator = 0.0

        self.is_paused = False
        self.selected_menu_index = 0

        self.is_showing_upgrade_panel = False
        self.selected_upgrade_panel = 0
        self.upgrade_options = [UpgradeOption.MAX_HP, UpgradeOption.MAX_AMMO]

        self.is_main_menu = True
        self.selected_menu_item = 0
        self.main_menu_music_playing = False
        self.background_music_playing = False
        self.quit_requested = False

        self._start_create_enemies()
        self.obstacles.extend(
            create_obstacles(START_OBSTACLES, map_width, map_height, self.rng)
        )

    def _new_player(self) -> Player:
        player = Player(
            self.map_width / 2.0,
            self.map_height / 2.0,
            PLAYER_SPEED,
            PLAYER_ANIMATION_SPEED,
            on_level_up=self.level_up_upgrade,
        )
        player.set_bounds(self.map_width, self.map_height)
        return player

    # --- spawning -------------------------------------------------------

    def _spawn(self, enemy_class: Type[Enemy], radius: float = SPAWN_RADIUS) -> None:
        x, y = spawn_position(self.player.x, self.player.y, radius, self.rng)
        self.enemies.append(enemy_class(x, y, ENEMY_DEFAULT_SPEED))

    def _start_create_enemies(self) -> None:
        for _ in range(10):
            self._spawn(BrainMonster)
            self._spawn(EyeMonster)

    def _spawn_lampreys(self) -> None:
        for _ in range(2):
            self._spawn(Lamprey)

    def clear_enemies(self) -> None:
        """Remove every enemy."""
        self.enemies.clear()

    def spawn_boss_near_player(self) -> None:
        """Place the winged boss close to the player."""
        self._spawn(WingedMonster, BOSS_SPAWN_RADIUS)

    def spawn_item(self, x: float, y: float) -> None:
        """Drop an experience item at a position."""
        self.items.append(Item(x, y))

    # --- game flow ------------------------------------------------------

    def reset_game(self) -> None:
        """Start a fresh round with a new player, enemies and obstacles."""
        self.player = self._new_player()
        self.enemies.clear()
        self.items.clear()
        self.obstacles.clear()
        self.game_time_seconds = 0
        self.enemy_spawn_timer = 0.0
        self.big_boomer_spawn_timer = 0.0
        self.lamprey_spawn_timer = 0.0
        self.yog_spawn_timer = 0.0
        self.camera.set_bounds(self.map_width, self.map_height)
        self._start_create_enemies()
        self.obstacles.extend(
            create_obstacles(START_OBSTACLES, self.map_width, self.map_height, self.rng)
        )

    def toggle_pause(self) -> None:
        """Pause or resume the game."""
        self.is_paused = not self.is_paused

    def toggle_main_menu(self) -> None:
        """Enter or leave the main menu."""
        self.is_main_menu = not self.is_main_menu
        if self.is_main_menu:
            self.reset_game()
            self.main_menu_music_playing = True
        else:
            self.main_menu_music_playing = False

    def handle_menu_input(self, key: str) -> None:
        """Navigate the main menu: start a game or ask to quit."""
        key = _normalise_key(key)
        if key == "up":
            self.selected_menu_item = (self.selected_menu_item - 1) % MAIN_MENU_ITEMS
        elif key == "down":
            self.selected_menu_item = (self.selected_menu_item + 1) % MAIN_MENU_ITEMS
        elif key == "return":
            if self.selected_menu_item == 0:
                self.toggle_main_menu()
                self.reset_game()
            else:
                self.quit_requested = True

    def pause_key_down(self, key: str) -> None:
        """Navigate the pause menu."""
        key = _normalise_key(key)
        if key == "up":
            self.selected_menu_index = (self.selected_menu_index - 1) % PAUSE_MENU_ITEMS
        elif key == "down":
            self.selected_menu_index = (self.selected_menu_index + 1) % PAUSE_MENU_ITEMS
        elif key == "return":
            self.pause_menu_select()

    def pause_menu_select(self) -> None:
        """Carry out the highlighted pause menu entry."""
        if self.selected_menu_index == 0:
            self.toggle_pause()
        elif self.selected_menu_index == 1:
            self.is_paused = False
            self.is_main_menu = True
            self.reset_game()
        elif self.selected_menu_index == 2:
            self.quit_requested = True

    # --- upgrades -------------------------------------------------------

    def level_up_upgrade(self) -> None:
        """React to the player levelling up."""
        self.show_upgrade_panel()

    def show_upgrade_panel(self) -> None:
        """Offer two distinct upgrades picked at random."""
        options = list(UpgradeOption)
        self.rng.shuffle(options)
        self.upgrade_options = options[:2]
        self.selected_upgrade_panel = 0
        self.is_showing_upgrade_panel = True

    def hide_upgrade_panel(self) -> None:
        """Close the upgrade panel."""
        self.is_showing_upgrade_panel = False

    def select_upgrade_panel(self, index: int) -> None:
        """Highlight the left (0) or right (1) upgrade."""
        if index not in (0, 1):
            raise ValueError(f"upgrade panel index must be 0 or 1, not {index}")
        self.selected_upgrade_panel = index

    def apply_selected_upgrade(self) -> None:
        """Apply the highlighted upgrade and close the panel."""
        if not self.is_showing_upgrade_panel:
            return
        option = self.upgrade_options[self.selected_upgrade_panel]
        if option is UpgradeOption.MAX_HP:
            self.player.max_health += 1
            self.player.health += 1
        elif option is UpgradeOption.MAX_AMMO:
            self.current_gun.max_ammo += 1
        elif option is UpgradeOption.ADD_SPEED:
            self.player.speed += SPEED_UPGRADE
        elif option is UpgradeOption.UPGRADE_GUN:
            self.upgrade_gun()
        self.hide_upgrade_panel()

    def upgrade_gun(self) -> None:
        """Switch to the next gun in the upgrade chain."""
        if self.current_gun is self.revolver:
            self.current_gun = self.headshot_gun
        elif self.current_gun is self.headshot_gun:
            self.current_gun = self.cluster_gun
        else:
            self.current_gun = self.dual_shotgun

    # --- combat ---------------------------------------------------------

    def fire_bullet(self, x: float, y: float, target_x: float, target_y: float) -> None:
        """Fire the current gun from a point towards a target."""
        if self.current_gun.fire_bullet():
            self.bullets.extend(bullets_for_gun(self.current_gun, x, y, target_x, target_y))

    def update(self, frame_time: float) -> None:
        """Advance the game by one frame."""
        if self.is_main_menu:
            self.main_menu_music_playing = True
        else:
            self.background_music_playing = True

        if self.is_paused or self.is_showing_upgrade_panel:
            return

        self.frame_time = frame_time
        self._time_accumulator += frame_time
        if self._time_accumulator >= 1.0:
            self.game_time_seconds += int(self._time_accumulator)
            self._time_accumulator = 0.0

        player = self.player
        player.update(frame_time, self.obstacles)
        self.camera.update(player.x, player.y)

        if player.health <= 0:
            self.reset_game()
            return

        for enemy in self.enemies:
            if (
                not player.is_invincible()
                and abs(player.x - enemy.x) < (PLAYER_WIDTH + enemy.width) / 2
                and abs(player.y - enemy.y) < (PLAYER_HEIGHT + enemy.height) / 2
            ):
                player.take_damage(1)

        self._update_items(frame_time)
        self._update_enemies(frame_time)
        self._update_bullets(frame_time)
        self._update_spawns(frame_time)

        if self.show_click_image:
            self.click_image_timer -= frame_time
            if self.click_image_timer <= 0.0:
                self.show_click_image = False

        self.current_gun.update_reload(frame_time)

    def _update_items(self, frame_time: float) -> None:
        remaining = []
        for item in self.items:
            item.update(frame_time)
            if (
                abs(self.player.x - item.x) < PLAYER_WIDTH
                and abs(self.player.y - item.y) < PLAYER_HEIGHT
            ):
                self.player.add_experience(ITEM_EXPERIENCE)
            else:
                remaining.append(item)
        self.items = remaining

    def _update_enemies(self, frame_time: float) -> None:
        remaining = []
        px, py = self.player.x, self.player.y
        for enemy in self.enemies:
            if isinstance(enemy, WingedMonster):
                enemy.update_boss(frame_time, px, py, self.obstacles)
            else:
                enemy.update(frame_time, px, py, self.obstacles)
            if enemy.is_dead():
                self.spawn_item(enemy.x, enemy.y)
            else:
                remaining.append(enemy)
        self.enemies = remaining

    def _update_bullets(self, frame_time: float) -> None:
        remaining = []
        for bullet in self.bullets:
            bullet.update(frame_time)
            if bullet.is_out_of_bounds(self.map_width, self.map_height):
                continue
            if bullet.is_hit:
                if bullet.is_effect_finished():
                    continue
            else:
                for enemy in self.enemies:
                    if bullet.check_collision(enemy.x, enemy.y, enemy.width, enemy.height):
                        enemy.take_damage(bullet.damage)
                        bullet.is_hit = True
                        break
            remaining.append(bullet)
        self.bullets = remaining

    def _update_spawns(self, frame_time: float) -> None:
        self.enemy_spawn_timer += frame_time
        if self.enemy_spawn_timer >= ENEMY_SPAWN_INTERVAL:
            self._start_create_enemies()
            self.enemy_spawn_timer = 0.0

        self.big_boomer_spawn_timer += frame_time
        if self.big_boomer_spawn_timer >= BIG_BOOMER_SPAWN_INTERVAL:
            for _ in range(3):
                self._spawn(BigBoomer)
            self.big_boomer_spawn_timer = 0.0

        self.lamprey_spawn_timer += frame_time
        if self.lamprey_spawn_timer >= LAMPREY_SPAWN_INTERVAL:
            self._spawn_lampreys()
            self._spawn_lampreys()
            self.lamprey_spawn_timer = 0.0

        self.yog_spawn_timer += frame_time
        if self.yog_spawn_timer >= YOG_SPAWN_INTERVAL:
            self._spawn(Yog)
            self.yog_spawn_timer = 0.0

    # --- input ----------------------------------------------------------

    def key_down(self, key: str) -> None:
        """Handle a key press."""
        key = _normalise_key(key)
        if key == "escape":
            self.toggle_pause()
            return
        if self.is_paused:
            self.pause_key_down(key)
            return
        if self.is_main_menu:
            self.handle_menu_input(key)
            return
        if self.is_showing_upgrade_panel:
            if key == "left":
                self.select_upgrade_panel(0)
            elif key == "right":
                self.select_upgrade_panel(1)
            elif key == "return":
                self.apply_selected_upgrade()
            return

        player = self.player
        if key == "Q":
            self.quit_requested = True
        elif key == "A":
            player.move_left = True
        elif key == "D":
            player.move_right = True
        elif key == "W":
            player.move_up = True
        elif key == "S":
            player.move_down = True
        elif key == "1":
            self.current_gun = self.revolver
        elif key == "2":
            self.current_gun = self.headshot_gun
        elif key == "3":
            self.current_gun = self.cluster_gun
        elif key == "4":
            self.current_gun = self.dual_shotgun
        elif key == "f1":
            player.max_health += 1
            player.health += 1
        elif key == "f2":
            for gun in (self.revolver, self.headshot_gun, self.cluster_gun, self.dual_shotgun):
                gun.max_ammo += 1
        elif key == "f3":
            player.speed += 1.0
        elif key == "f4":
            if self.current_gun is not self.dual_shotgun:
                self.upgrade_gun()
        elif key == "f9":
            self.clear_enemies()
            self.spawn_boss_near_player()

    def key_up(self, key: str) -> None:
        """Handle a key release."""
        if self.is_paused or self.is_main_menu:
            return
        key = _normalise_key(key)
        player = self.player
        if key == "A":
            player.move_left = False
        elif key == "D":
            player.move_right = False
        elif key == "W":
            player.move_up = False
        elif key == "S":
            player.move_down = False

    def mouse_move(self, x: int, y: int) -> None:
        """Track the cursor and turn the player towards it."""
        self.cursor_x = x
        self.cursor_y = y
        player_screen_x = self.player.x - self.camera.offset_x
        self.player.direction_left = x < player_screen_x

    def mouse_click(self, x: int, y: int) -> None:
        """Show the click marker and fire at the clicked map position."""
        self.show_click_image = True
        self.click_image_timer = CLICK_IMAGE_TIME
        self.cursor_x = x
        self.cursor_y = y
        if self.is_paused or self.is_showing_upgrade_panel or self.is_main_menu:
            return
        self.fire_bullet(
            self.player.x,
            self.player.y,
            x + self.camera.offset_x,
            y + self.camera.offset_y,
        )

    def game_time_text(self) -> str:
        """Elapsed round time as MM:SS."""
        minutes, seconds = divmod(self.game_time_seconds, 60)
        return f"{minutes:02d}:{seconds:02d}"