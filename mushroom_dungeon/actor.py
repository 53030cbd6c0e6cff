"""Actors placed in the world, and pawns that move themselves."""

from __future__ import annotations

from typing import Any, List, Optional, Sequence

from pygame.math import Vector2

from .physics import Collider, can_move, check_overlapping
from .sprites import AnimSprite, Frame
from .textures import Texture2D


class Actor:
    """An animated object with a position and an optional collider.

    ``world`` is set by the world that spawns the actor; it provides
    ``actors``, ``surface`` and ``remove_actor``.
    """

    def __init__(
        self,
        texture: Texture2D,
        sub_texture_name: str,
        position: Sequence[float],
        size: Sequence[float] = (1.0, 1.0),
        rotation: float = 0.0,
    ) -> None:
        self.anim_sprite = AnimSprite(texture, sub_texture_name, position, size, rotation)
        self.position = Vector2(position)
        self.rotation = float(rotation)
        self.collider: Optional[Collider] = None
        self.world: Any = None
        self.has_begun_play = False
        self.last_overlap: Optional["Actor"] = None

    @property
    def actors(self) -> List["Actor"]:
        """The actors of the world this actor lives in."""
        if self.world is None:
            return []
        return list(self.world.actors)

    def update(self, delta_time: float) -> None:
        """Advance the animation, draw, and report overlaps."""
        self.anim_sprite.update(delta_time)
        surface = getattr(self.world, "surface", None)
        if surface is not None:
            self.anim_sprite.render(surface)
        if self.collider is not None:
            check_overlapping(self.collider, self.actors)

    def begin_play(self) -> None:
        """Mark the actor as playing."""
        self.has_begun_play = True

    def set_position(self, position: Sequence[float]) -> None:
        self.position = Vector2(position)
        self.anim_sprite.position = Vector2(position)
        if self.collider is not None:
            self.collider.position = Vector2(position)

    def set_size(self, size: Sequence[float]) -> None:
        self.anim_sprite.size = Vector2(size)
        if self.collider is not None:
            self.collider.size = Vector2(size)

    def set_rotation(self, rotation: float) -> None:
        self.rotation = float(rotation)
        self.anim_sprite.rotation = float(rotation)

    def add_anim_state(self, state_name: str, frames: Sequence[Frame]) -> None:
        """Add an animation made of (sub-texture name, duration) frames."""
        self.anim_sprite.insert_state(state_name, frames)

    def play_anim(self, state_name: str) -> None:
        self.anim_sprite.set_state(state_name)

    def overlap(self, other: "Actor") -> None:
        """Remember the actor this actor's collider last overlapped."""
        self.last_overlap = other

    def destroy(self) -> None:
        """Remove this actor from its world."""
        if self.world is not None:
            self.world.remove_actor(self)


class Pawn(Actor):
    """An actor that moves along its move vector at its move speed."""

    def __init__(
        self,
        texture: Texture2D,
        sub_texture_name: str,
        position: Sequence[float] = (0.0, 0.0),
        size: Sequence[float] = (1.0, 1.0),
        rotation: float = 0.0,
        move_speed: float = 0.0,
    ) -> None:
        super().__init__(texture, sub_texture_name, position, size, rotation)
        self.move_speed = float(move_speed)
        self.move_vector = Vector2(0.0, 0.0)

    def update(self, delta_time: float) -> None:
        self.move(delta_time)
        super().update(delta_time)

    def move(self, delta_time: float) -> None:
        """Step along the move vector unless the target position is blocked."""
        if self.move_vector == Vector2(0.0, 0.0):
            return
        target = self.position + self.move_vector * delta_time * self.move_speed
        if self.collider is None or can_move(self, target, self.actors):
            self.set_position(target)

    def change_move_vector(self, value: Sequence[float]) -> None:
        self.move_vector += Vector2(value)