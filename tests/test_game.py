import pygame
import pytest
from pygame.math import Vector2

from mushroom_dungeon.character import MainCharacter
from mushroom_dungeon.enemies import MeleeEnemy
from mushroom_dungeon.game import World
from mushroom_dungeon.objects import HealActor, Wall
from mushroom_dungeon.resources import (
    ATLAS_NAME,
    SUB_TEXTURE_NAMES,
    TILE_SIZE,
    ResourceNotFoundError,
    Resources,
)


@pytest.fixture
def resources(tmp_path):
    res = Resources(tmp_path)
    surface = pygame.Surface((TILE_SIZE * len(SUB_TEXTURE_NAMES), TILE_SIZE))
    texture = res.add_texture(ATLAS_NAME, surface)
    res.slice_atlas(texture, SUB_TEXTURE_NAMES, TILE_SIZE, TILE_SIZE)
    return res


@pytest.fixture
def world(resources):
    return World(resources, (1280, 720))


def test_spawn_actor_registers_actor(world):
    wall = world.spawn_actor(Wall, "wall", (5.0, 6.0), (7.0, 8.0))
    assert world.actors == [wall]
    assert wall.world is world
    assert wall.position == Vector2(5.0, 6.0)
    assert wall.collider.size == Vector2(7.0, 8.0)


def test_spawn_without_atlas_raises(tmp_path):
    world = World(Resources(tmp_path))
    with pytest.raises(ResourceNotFoundError):
        world.spawn_actor(Wall, "wall")


def test_remove_actor(world):
    wall = world.spawn_actor(Wall, "wall")
    assert world.remove_actor(wall) is True
    assert world.actors == []
    assert world.remove_actor(wall) is False


def test_destroy_goes_through_world(world):
    heal = world.spawn_actor(HealActor, "heal")
    heal.destroy()
    assert heal not in world.actors


def test_begin_play_layout(world):
    character = world.begin_play()
    assert len(world.actors) == 6
    assert world.actors[-1] is character
    assert world.main_character is character
    assert sum(isinstance(a, Wall) for a in world.actors) == 3
    assert sum(isinstance(a, MeleeEnemy) for a in world.actors) == 1
    assert sum(isinstance(a, HealActor) for a in world.actors) == 1
    assert character.move_speed == 100.0
    assert character.anim_sprite.current_state == "walk"
    assert world.game_over is False


def test_begin_play_centres_character(resources):
    world = World(resources, (100, 100))
    character = world.begin_play()
    centre = character.position + character.collider.size / 2.0
    assert centre == Vector2(world.screen_size) / 2.0


def test_begin_play_enemy_patrol(world):
    world.begin_play()
    enemy = next(a for a in world.actors if isinstance(a, MeleeEnemy))
    assert enemy.patrol_points[0] == Vector2(100.0, 100.0)
    assert enemy.current_patrol_point == Vector2(100.0, 100.0)
    assert enemy.move_speed == 50.0


def test_move_all_actors_skips_player(world):
    character = world.begin_play()
    before = {id(a): Vector2(a.position) for a in world.actors}
    world.move_all_actors((10.0, -4.0))
    for actor in world.actors:
        if actor is character:
            assert actor.position == before[id(actor)]
        else:
            assert actor.position == before[id(actor)] - Vector2(10.0, -4.0)


def test_move_all_actors_shifts_patrol_by_player_direction(world):
    character = world.begin_play()
    enemy = next(a for a in world.actors if isinstance(a, MeleeEnemy))
    old = [Vector2(p) for p in enemy.patrol_points]
    character.move_vector = Vector2(1.0, 0.0)
    world.move_all_actors((10.0, 0.0))
    assert enemy.patrol_points == [p - Vector2(1.0, 0.0) for p in old]


def test_update_moves_enemy_towards_patrol_point(world):
    world.begin_play()
    enemy = next(a for a in world.actors if isinstance(a, MeleeEnemy))
    before = enemy.position.distance_to(enemy.current_patrol_point)
    world.update(0.1)
    after = enemy.position.distance_to(enemy.current_patrol_point)
    assert after < before


def test_update_does_nothing_after_game_over(world):
    world.begin_play()
    enemy = next(a for a in world.actors if isinstance(a, MeleeEnemy))
    world.game_over = True
    world.update(0.1)
    assert enemy.position == Vector2(0.0, 0.0)


def test_update_draws_on_surface(resources):
    surface = pygame.Surface((320, 240))
    surface.fill((255, 255, 255))
    world = World(resources, surface.get_size(), surface)
    world.spawn_actor(Wall, "wall", (0.0, 0.0), (100.0, 100.0))
    world.update(0.01)
    assert surface.get_at((50, 190))[:3] != (255, 255, 255)
    assert surface.get_at((300, 10))[:3] == (255, 255, 255)


def test_character_spawned_by_type(world):
    character = world.spawn_actor(MainCharacter, "mush1")
    assert character.weapon.world is world