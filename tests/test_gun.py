import pytest

from survivorgame.gun import ClusterGun, DualShotgun, Gun, HeadshotGun, Revolver


@pytest.mark.parametrize(
    "cls, capacity",
    [(Revolver, 5), (HeadshotGun, 7), (ClusterGun, 10), (DualShotgun, 4)],
)
def test_magazine_sizes(cls, capacity):
    gun = cls()
    assert gun.max_ammo == capacity
    assert gun.current_ammo == capacity
    assert gun.is_reloading() is False


def test_firing_spends_ammo():
    gun = Revolver()
    assert gun.fire_bullet() is True
    assert gun.current_ammo == gun.max_ammo - 1


def test_emptying_starts_reload_and_blocks_fire():
    gun = Revolver()
    results = [gun.fire_bullet() for _ in range(gun.max_ammo)]
    assert all(results)
    assert gun.current_ammo == 0
    assert gun.is_reloading() is True
    assert gun.fire_bullet() is False


def test_cannot_fire_without_ammo():
    gun = Gun(3)
    gun.current_ammo = 0
    assert gun.fire_bullet() is False


def test_reload_progresses_through_frames_then_refills():
    gun = DualShotgun()
    for _ in range(gun.max_ammo):
        gun.fire_bullet()
    gun.update_reload(0.5)
    assert gun.is_reloading() is True
    assert gun.reload_frame == 1
    gun.update_reload(0.5)
    assert gun.is_reloading() is False
    assert gun.current_ammo == gun.max_ammo


def test_update_reload_idle_does_nothing():
    gun = HeadshotGun()
    gun.update_reload(5.0)
    assert gun.reload_timer == 0.0
    assert gun.current_ammo == gun.max_ammo


def test_reload_resets_timer_and_frame():
    gun = ClusterGun()
    gun.reload_timer = 0.7
    gun.reload_frame = 2
    gun.reload()
    assert (gun.reloading, gun.reload_timer, gun.reload_frame) == (True, 0.0, 0)


def test_aim_angle_right_and_left():
    gun = Revolver()
    assert gun.aim_angle(0.0, 0.0, 10.0, 0.0, False) == pytest.approx(0.0)
    assert gun.aim_angle(0.0, 0.0, 10.0, 0.0, True) == pytest.approx(180.0)


def test_aim_angle_downward():
    gun = Revolver()
    assert gun.aim_angle(5.0, 5.0, 5.0, 50.0, False) == pytest.approx(90.0)