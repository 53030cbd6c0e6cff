# mushroom_dungeon

A small top-down 2D arcade game. You are a mushroom. Walls block your way, a
patrolling enemy hurts you when it touches you, and a heal pickup restores
health. Click to fire your pistol toward the cursor.

The game runs in a pygame window and draws every sprite from one texture
atlas of 16×16 tiles.

## Installation

```
pip install .
```

To also install what the tests need:

```
pip install ".[test]"
```

## Running the game

```
mushroom-dungeon
```

Options:

| Option              | Meaning                                                        |
|---------------------|----------------------------------------------------------------|
| `--resources DIR`   | Directory that holds the `resources` folder. By default, the directory of the program that was started. |
| `--width N`         | Window width in pixels (default 1280).                          |
| `--height N`        | Window height in pixels (default 720).                          |

On start-up the game loads the texture atlas. If the atlas cannot be loaded,
it prints the error and exits with status 1. Otherwise it runs two built-in
physics checks and prints each result as `1` (passed) or `0` (failed):

```
Physic tests: 
block_between_two_objects: 1
overlap_between_two_objects: 1
```

It then opens the window, titled "Platformer2D", and begins play.

### Controls

| Input                 | Action                          |
|-----------------------|---------------------------------|
| `W` / `A` / `S` / `D` | Move up / left / down / right   |
| Left mouse button     | Shoot toward the cursor (on both press and release) |
| `Esc`                 | Quit                            |

Closing the window also quits. The character stays where it is on screen.
When you move, every other actor slides the other way.

### Resources

The atlas is read from `resources/textures/mushroom.png`, relative to the
resources directory. It is cut into 16×16 cells, left to right and top row
first, named in this order:

`mush1`, `mush2`, `mush3`, `wall`, `fullHeart`, `emptyHeart`, `heal`,
`pistolBullet`, `pistol`, `bomb`.

## Gameplay rules

- Health has a maximum of 10 and starts at 8. A row of ten heart icons is
  drawn along the top of the screen.
- Touching an enemy costs 1 health. After a hit that does not kill you, you
  cannot be hurt for one second.
- A heal pickup restores 5 health, never beyond the maximum, and is used up.
- When health reaches zero the game is over and the world stops updating.
- The pistol does 5 damage and needs one second between shots. A bullet
  flies at 200 units per second and disappears when it hits an enemy or a
  wall. The enemy has 1 health, so one hit destroys it.
- The enemy walks back and forth between its patrol points.

## Using it as a library

The parts of the game are ordinary Python objects. Most of them can be used
without a window. World coordinates have y pointing up.

- `mushroom_dungeon.physics`: `Collider`, `ObjectType`, `ResponseType` and
  the collision checks `is_blocking`, `is_overlap`, `can_move` and
  `check_overlapping`.
- `mushroom_dungeon.textures`: `Texture2D` and `SubTexture`, named UV
  regions of a surface.
- `mushroom_dungeon.sprites`: `Sprite` and the frame-timed `AnimSprite`.
- `mushroom_dungeon.resources`: `Resources`, which loads textures and atlases
  and looks them up by name, and `ResourceNotFoundError`.
- `mushroom_dungeon.actor`: `Actor` and the self-moving `Pawn`.
- `mushroom_dungeon.objects`: `Wall` and `HealActor`.
- `mushroom_dungeon.enemies`: `Enemy` and the patrolling `MeleeEnemy`.
- `mushroom_dungeon.weapons`: `WeaponType`, `Bullet`, `PistolBullet` and
  `WeaponComponent`.
- `mushroom_dungeon.health`: `HealthComponent`.
- `mushroom_dungeon.controllers`: `Key`, `InputAction`, `movement_for_key`,
  `Controller` and `PlayerController`.
- `mushroom_dungeon.character`: `MainCharacter`, the player.
- `mushroom_dungeon.game`: `World`, which owns the actors, runs each frame
  and lays out the level in `begin_play`.
- `mushroom_dungeon.app`: `main`, `run` and `run_physics_checks`.

```python
from mushroom_dungeon.physics import Collider, ObjectType, ResponseType, is_blocking

player = Collider(ObjectType.CHARACTER, (0.0, 0.0), (100.0, 100.0))
player.set_collision_response(ObjectType.STATIC_OBJECT, ResponseType.BLOCK)
wall = Collider(ObjectType.STATIC_OBJECT, (0.0, 101.0), (100.0, 100.0))

# Would stepping 20 units up run into the wall?
print(is_blocking(wall.position, (0.0, 20.0), player.size, wall.size, player, wall))  # True
```

## What it does not do

- There is one fixed level; levels are not generated or loaded from files.
- There is no menu and no game-over screen. When health reaches zero the
  actors stop being drawn until the window is closed.
- Only the pistol can fire. The other weapon types carry damage and fire
  interval figures but cannot be used.
- Nothing is saved between runs.

## Tests

```
pip install ".[test]"
pytest
```