# survivorgame

This package holds the game state and rules for a top-down arcade survivor
shooter. The player walks around a map, shoots at monsters that close in from
every side, and collects the experience items they drop. Each level gained
offers a choice of two upgrades.

The package is pure Python and has no dependencies.

## Modules

- `survivorgame.player`: `Player`. It covers movement driven by the held
  direction flags (`move_left`, `move_right`, `move_up`, `move_down`), clamping
  to the map bounds, collision with obstacles, experience and levelling, health,
  and two seconds of invincibility after a hit. An optional `on_level_up`
  callback is called on every level gained. Helpers for a frontend are
  `experience_fraction()`, `advance_heart_animation()` and
  `level_up_effect_frame()`.
- `survivorgame.enemy`: `Enemy` and the monster kinds `BrainMonster`,
  `EyeMonster`, `BigBoomer`, `Lamprey` and `Yog`. Each one walks straight
  towards the player unless an obstacle blocks it. `WingedMonster` is the boss.
  Its `update_boss()` makes it chase the player and dash at 600 units/s every
  1.5 seconds. When an enemy's health reaches zero it plays a 0.5 second death
  effect (`death_effect_frame()`), and after that `is_dead()` returns true.
- `survivorgame.gun`: `Gun`, plus `Revolver` (5 rounds), `HeadshotGun` (7),
  `ClusterGun` (10) and `DualShotgun` (4). `fire_bullet()` spends a round. A
  gun starts reloading when it is emptied, and the reload takes one second
  (`update_reload()`). `aim_angle()` gives the angle at which to draw the gun.
- `survivorgame.bullet`: `Bullet` and one bullet class for each gun. A bullet
  travels at 1500 units/s. Damage is 50 for the revolver, 75 for the cluster
  gun, and 100 for the headshot gun and the shotgun. After a hit, a bullet
  plays a 0.25 second hit effect (`hit_effect_frame()`, `is_effect_finished()`).
  A bullet whose target equals its origin raises `ValueError`.
- `survivorgame.item`: `Item`, an experience pickup with a two-frame animation.
- `survivorgame.obstacle`: `Obstacle`, a rectangle with `intersects()`.
- `survivorgame.camera`: `Camera`, a view offset centred on the player and
  clamped to the map bounds.
- `survivorgame.spawning`: three functions.
  - `spawn_position()` picks a point on a ring around the player.
  - `create_obstacles()` scatters obstacles over the map using a
    `random.Random`.
  - `bullets_for_gun()` returns the bullets that one shot of a gun produces.
    The cluster gun fires two bullets and the shotgun fires five pellets spread
    10° apart.
- `survivorgame.events`: `EventType` and the `Event` dataclass, for describing
  game events.
- `survivorgame.game`: `GameFramework`, which holds the whole game. It runs:
  - the main menu and the pause menu;
  - spawn timers that add a wave every 10 s, big boomers every 30 s, lampreys
    every 45 s and a yog every 60 s;
  - contact damage, item pickup and bullet hits;
  - the level-up panel (`UpgradeOption`, `upgrade_option_text()`);
  - the round clock (`game_time_text()`).

  A game restarts when the player's health reaches zero. `GameFramework` takes
  an optional `random.Random`, so a run can be reproduced.

## Input

`GameFramework.key_down()` and `key_up()` take key names. Single characters
are case-insensitive. Named keys are `"up"`, `"down"`, `"left"`, `"right"`,
`"return"`, `"escape"` and `"f1"` to `"f9"`, and any case is accepted. The
keys do the following:

- `W`, `A`, `S`, `D` move the player.
- `1` to `4` choose a gun.
- `escape` pauses the game.
- `Q` sets `quit_requested`.
- `f1`, `f2`, `f3` and `f4` are debug upgrades: health, ammo, speed and gun.
- `f9` clears the enemies and spawns the boss next to the player.

`mouse_move()` turns the player towards the cursor. `mouse_click()` fires at
the clicked screen point, which is converted to map coordinates through the
camera.

## Example

```python
import random

from survivorgame.game import GameFramework

game = GameFramework(rng=random.Random(1))
game.handle_menu_input("return")   # choose START on the main menu
game.key_down("D")                 # hold "move right"
game.update(1 / 60)
game.mouse_click(400, 300)         # fire at screen point (400, 300)
print(len(game.bullets), game.current_gun.current_ammo)   # 1 4
print(game.game_time_text())       # "00:00"
```

## What the package does not do

The package contains no window, no drawing, no sound, no networking and no
command to run. Those belong to a frontend. Each frame, the frontend calls
`GameFramework.update()`, passes input in through `key_down()`, `key_up()`,
`mouse_move()` and `mouse_click()`, and draws from the public state. The
image paths in the modules (for example `Gun.image_path`,
`survivorgame.player.IDLE_IMAGES` and `survivorgame.enemy.DEATH_EFFECT_IMAGES`)
are only names for such a frontend to load. The music flags on
`GameFramework` record what should be playing and play nothing themselves.

## Installing and testing

```
pip install .[test]
pytest
```