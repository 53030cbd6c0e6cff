"""Static world objects: walls and healing pick-ups."""

from __future__ import annotations

from typing import Sequence

from .actor import Actor
from .physics import Collider, ObjectType, ResponseType
from .textures import Texture2D

DEFAULT_HEAL_VALUE = 5


class Wall(Actor):
    """A static obstacle."""

    def __init__(
        self,
        texture: Texture2D,
        sub_texture_name: str,
        position: Sequence[float],
        size: Sequence[float] = (1.0, 1.0),
        rotation: float = 0.0,
    ) -> None:
        super().__init__(texture, sub_texture_name, position, size, rotation)
        self.collider = Collider(ObjectType.STATIC_OBJECT, position, size)


class HealActor(Actor):
    """A pick-up that restores health to the character touching it."""

    def __init__(
        self,
        texture: Texture2D,
        sub_texture_name: str,
        position: Sequence[float],
        size: Sequence[float] = (1.0, 1.0),
        rotation: float = 0.0,
    ) -> None:
        super().__init__(texture, sub_texture_name, position, size, rotation)
        self.collider = Collider(ObjectType.INTERACTIVE_OBJECT, position, size)
        self.collider.set_collision_response(ObjectType.CHARACTER, ResponseType.IGNORE)
        self.collider.set_collision_response(ObjectType.ENEMY, ResponseType.IGNORE)
        self.collider.set_collision_response(ObjectType.PROJECTILE, ResponseType.IGNORE)
        self.heal_value = DEFAULT_HEAL_VALUE

    def begin_play(self) -> None:
        """Start play; a pick-up needs nothing beyond the actor's own set-up."""
        super().begin_play()