"""The world: the set of live actors, the player, and the level layout."""

from __future__ import annotations

from typing import Any, List, Optional, Sequence, Tuple, Type, TypeVar

import pygame
from pygame.math import Vector2

from .actor import Actor
from .character import MainCharacter
from .enemies import MeleeEnemy
from .objects import HealActor, Wall
from .resources import ATLAS_NAME, Resources

DEFAULT_SCREEN_SIZE: Tuple[int, int] = (1280, 720)

A = TypeVar("A", bound=Actor)


class World:
    """Holds every actor, updates them each frame and lays out the level."""

    def __init__(
        self,
        resources: Resources,
        screen_size: Sequence[int] = DEFAULT_SCREEN_SIZE,
        surface: Optional[pygame.Surface] = None,
    ) -> None:
        self.resources = resources
        self.screen_size = (int(screen_size[0]), int(screen_size[1]))
        self.surface = surface
        self.actors: List[Actor] = []
        self.main_character: Optional[MainCharacter] = None
        self.game_over = False

    def spawn_actor(
        self,
        actor_type: Type[A],
        sprite_name: str,
        position: Sequence[float] = (0.0, 0.0),
        size: Sequence[float] = (100.0, 100.0),
        rotation: float = 0.0,
    ) -> A:
        """Create an actor with the atlas texture and add it to the world."""
        texture = self.resources.texture(ATLAS_NAME)
        actor = actor_type(texture, sprite_name, position, size, rotation)
        actor.world = self
        self.actors.append(actor)
        return actor

    def remove_actor(self, actor: Any) -> bool:
        """Remove an actor; return whether it was in the world."""
        for index, candidate in enumerate(self.actors):
            if candidate is actor:
                del self.actors[index]
                return True
        return False

    def move_all_actors(self, offset: Sequence[float]) -> None:
        """Shift every actor except the player by ``-offset``."""
        shift = Vector2(offset)
        for actor in list(self.actors):
            if actor is self.main_character:
                continue
            actor.set_position(actor.position - shift)
            if isinstance(actor, MeleeEnemy) and self.main_character is not None:
                actor.change_patrol_points_coordinate(-self.main_character.move_vector)

    def update(self, delta_time: float) -> None:
        """Advance the player and then every actor, unless the game is over."""
        if self.game_over:
            return
        if self.main_character is not None:
            self.main_character.update(delta_time)
        for actor in list(self.actors):
            if any(actor is alive for alive in self.actors):
                actor.update(delta_time)

    def begin_play(self) -> MainCharacter:
        """Lay out the level and spawn the player; return the player."""
        self.game_over = False

        self.spawn_actor(Wall, "wall", (800.0, 360.0), (240.0, 240.0))
        self.spawn_actor(Wall, "wall", (100.0, 600.0), (240.0, 240.0))
        self.spawn_actor(Wall, "wall", (800.0, 600.0), (240.0, 240.0))

        enemy = self.spawn_actor(MeleeEnemy, "mush1", (0.0, 0.0), (100.0, 100.0))
        enemy.set_patrol_points([(100.0, 100.0), (150.0, 120.0), (120.0, 180.0)])
        enemy.move_speed = 50.0

        self.spawn_actor(HealActor, "heal", (200.0, 200.0), (50.0, 50.0))

        size = Vector2(50.0, 50.0)
        width, height = self.screen_size
        position = (width // 2 - size.x / 2.0, height // 2 - size.y / 2.0)
        character = self.spawn_actor(MainCharacter, "mush1", position, size)
        self.main_character = character

        character.add_anim_state("walk", [("mush1", 1.0), ("mush2", 1.0), ("mush3", 1.0)])
        character.play_anim("walk")
        character.begin_play()
        character.move_speed = 100.0
        return character