import random

import pytest

from survivorgame.bullet import RevolverBullet
from survivorgame.enemy import BrainMonster, EyeMonster, WingedMonster
from survivorgame.game import GameFramework, UpgradeOption, upgrade_option_text
from survivorgame.gun import ClusterGun, DualShotgun, HeadshotGun, Revolver


def make_game(seed=1):
    return GameFramework(rng=random.Random(seed))


def started_game(seed=1):
    game = make_game(seed)
    game.handle_menu_input("return")
    game.enemies.clear()
    game.obstacles.clear()
    return game


def test_upgrade_option_text():
    assert upgrade_option_text(UpgradeOption.MAX_HP) == "MaxHp +1"
    assert upgrade_option_text(UpgradeOption.MAX_AMMO) == "Max Ammo +1"
    assert upgrade_option_text(UpgradeOption.ADD_SPEED) == "Add Speed"
    assert upgrade_option_text(UpgradeOption.UPGRADE_GUN) == "Upgrade Gun"
    assert upgrade_option_text(99) == "Unknown"


def test_initial_state():
    game = make_game()
    assert game.is_main_menu
    assert isinstance(game.current_gun, Revolver)
    assert len(game.obstacles) == 100
    assert sum(isinstance(e, BrainMonster) for e in game.enemies) == 10
    assert sum(isinstance(e, EyeMonster) for e in game.enemies) == 10
    assert game.player.x == game.map_width / 2.0
    assert game.player.y == game.map_height / 2.0


def test_main_menu_navigation_wraps():
    game = make_game()
    game.handle_menu_input("up")
    assert game.selected_menu_item == 1
    game.handle_menu_input("down")
    assert game.selected_menu_item == 0


def test_main_menu_start_and_quit():
    game = make_game()
    game.handle_menu_input("return")
    assert not game.is_main_menu
    other = make_game()
    other.handle_menu_input("down")
    other.handle_menu_input("return")
    assert other.quit_requested
    assert other.is_main_menu


def test_escape_toggles_pause_and_pause_menu():
    game = started_game()
    game.key_down("escape")
    assert game.is_paused
    game.key_down("up")
    assert game.selected_menu_index == 2
    game.key_down("down")
    game.key_down("down")
    assert game.selected_menu_index == 1
    game.key_down("return")
    assert not game.is_paused
    assert game.is_main_menu


def test_pause_resume_selection():
    game = started_game()
    game.toggle_pause()
    game.pause_menu_select()
    assert not game.is_paused


def test_upgrade_panel_offers_two_distinct_options():
    game = started_game()
    game.show_upgrade_panel()
    assert game.is_showing_upgrade_panel
    assert len(set(game.upgrade_options)) == 2
    assert game.selected_upgrade_panel == 0


def test_select_upgrade_panel_rejects_bad_index():
    game = started_game()
    with pytest.raises(ValueError):
        game.select_upgrade_panel(2)


def test_apply_max_hp_upgrade():
    game = started_game()
    game.show_upgrade_panel()
    game.upgrade_options = [UpgradeOption.MAX_HP, UpgradeOption.MAX_AMMO]
    before_health = game.player.health
    before_max = game.player.max_health
    game.apply_selected_upgrade()
    assert game.player.health == before_health + 1
    assert game.player.max_health == before_max + 1
    assert not game.is_showing_upgrade_panel


def test_apply_ammo_upgrade_via_keys():
    game = started_game()
    game.show_upgrade_panel()
    game.upgrade_options = [UpgradeOption.ADD_SPEED, UpgradeOption.MAX_AMMO]
    before = game.current_gun.max_ammo
    game.key_down("right")
    game.key_down("return")
    assert game.current_gun.max_ammo == before + 1


def test_upgrade_gun_chain():
    game = started_game()
    assert game.current_gun.max_ammo == 5
    game.upgrade_gun()
    assert isinstance(game.current_gun, HeadshotGun)
    assert game.current_gun.max_ammo == 7
    game.upgrade_gun()
    assert isinstance(game.current_gun, ClusterGun)
    assert game.current_gun.max_ammo == 10
    game.upgrade_gun()
    assert isinstance(game.current_gun, DualShotgun)
    assert game.current_gun.max_ammo == 4
    game.upgrade_gun()
    assert isinstance(game.current_gun, DualShotgun)
    assert game.current_gun.max_ammo == 4


@pytest.mark.parametrize("key,count", [("1", 1), ("2", 1), ("3", 2), ("4", 5)])
def test_fire_bullet_per_gun(key, count):
    game = started_game()
    game.key_down(key)
    ammo = game.current_gun.current_ammo
    game.fire_bullet(100.0, 100.0, 200.0, 100.0)
    assert len(game.bullets) == count
    assert game.current_gun.current_ammo == ammo - 1


def test_mouse_click_in_menu_does_not_fire():
    game = make_game()
    game.mouse_click(10, 10)
    assert game.bullets == []
    assert game.show_click_image


def test_mouse_click_in_game_fires():
    game = started_game()
    game.mouse_click(10, 10)
    assert len(game.bullets) == 1


def test_mouse_move_sets_direction():
    game = started_game()
    game.camera.update(game.player.x, game.player.y)
    game.mouse_move(0, 0)
    assert game.player.direction_left
    game.mouse_move(799, 0)
    assert not game.player.direction_left


def test_movement_keys():
    game = started_game()
    game.key_down("a")
    assert game.player.move_left
    game.key_up("a")
    assert not game.player.move_left
    game.key_down("S")
    assert game.player.move_down


def test_game_time_advances():
    game = started_game()
    game.update(1.0)
    assert game.game_time_seconds == 1
    assert game.game_time_text() == "00:01"


def test_item_collection_gives_experience():
    game = started_game()
    game.spawn_item(game.player.x, game.player.y)
    game.update(0.01)
    assert game.items == []
    assert game.player.experience == 10


def test_level_up_shows_panel_and_freezes_time():
    game = started_game()
    game.player.add_experience(100)
    assert game.is_showing_upgrade_panel
    game.update(1.0)
    assert game.game_time_seconds == 0


def test_dead_enemy_drops_item():
    game = started_game()
    enemy = BrainMonster(10.0, 10.0, 5.0)
    game.enemies.append(enemy)
    enemy.take_damage(1000)
    game.update(0.5)
    assert enemy not in game.enemies
    assert len(game.items) == 1
    assert (game.items[0].x, game.items[0].y) == (enemy.x, enemy.y)


def test_bullet_hits_enemy():
    game = started_game()
    enemy = BrainMonster(490.0, 490.0, 5.0, 50, 50.0, 50.0)
    game.enemies.append(enemy)
    bullet = RevolverBullet(500.0, 500.0, 600.0, 500.0)
    game.bullets.append(bullet)
    game.update(0.001)
    assert bullet.is_hit
    assert enemy.health == 0
    assert enemy.is_dying


def test_player_death_resets_game():
    game = started_game()
    old = game.player
    old.health = 0
    game.update(0.01)
    assert game.player is not old
    assert game.player.health == game.player.max_health
    assert len(game.obstacles) == 100


def test_enemy_spawn_wave():
    game = started_game()
    game.update(10.0)
    assert sum(isinstance(e, BrainMonster) for e in game.enemies) == 10
    assert sum(isinstance(e, EyeMonster) for e in game.enemies) == 10


def test_f9_spawns_boss_near_player():
    game = started_game()
    game.enemies.append(BrainMonster(0.0, 0.0, 5.0))
    game.key_down("F9")
    assert len(game.enemies) == 1
    boss = game.enemies[0]
    assert isinstance(boss, WingedMonster)
    distance = ((boss.x - game.player.x) ** 2 + (boss.y - game.player.y) ** 2) ** 0.5
    assert distance == pytest.approx(100.0)


def test_game_time_text_format():
    game = started_game()
    game.game_time_seconds = 600
    assert game.game_time_text() == "10:00"
    assert len(game.game_time_text().split(":")) == 2