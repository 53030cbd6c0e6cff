"""Weapon types, bullets, and the weapon a character carries."""

from __future__ import annotations

import enum
from typing import Any, Dict, Optional, Sequence, Tuple

import pygame
from pygame.math import Vector2

from .actor import Actor
from .enemies import Enemy
from .physics import Collider, ObjectType, ResponseType, can_move
from .sprites import Sprite
from .textures import Texture2D

PISTOL_BULLET_SPRITE = "pistolBullet"
PISTOL_DAMAGE = 5
PISTOL_BULLET_SPEED = 200.0


class WeaponType(enum.Enum):
    """Kinds of weapon."""

    PISTOL = enum.auto()
    ASSAULT_RIFLE = enum.auto()
    SNIPER_RIFLE = enum.auto()
    SUB_MACHINE_GUN = enum.auto()

    @property
    def damage(self) -> int:
        return WEAPON_STATS[self][0]

    @property
    def fire_interval(self) -> float:
        """Seconds between two shots."""
        return WEAPON_STATS[self][1]


WEAPON_STATS: Dict[WeaponType, Tuple[int, float]] = {
    WeaponType.PISTOL: (5, 1.0),
    WeaponType.ASSAULT_RIFLE: (3, 0.5),
    WeaponType.SNIPER_RIFLE: (10, 2.0),
    WeaponType.SUB_MACHINE_GUN: (2, 0.5),
}


class Bullet(Actor):
    """A projectile flying along its move vector at its speed."""

    def __init__(
        self,
        texture: Texture2D,
        sub_texture_name: str,
        position: Sequence[float],
        size: Sequence[float] = (1.0, 1.0),
        rotation: float = 0.0,
    ) -> None:
        super().__init__(texture, sub_texture_name, position, size, rotation)
        self.move_vector = Vector2(0.0, 0.0)
        self.speed = 0.0
        self.damage = 0

    def update(self, delta_time: float) -> None:
        """Fly on unless blocked; a blocked bullet stays where it is."""
        target = self.position + self.move_vector * self.speed * delta_time
        if self.collider is None or can_move(self, target, self.actors):
            self.set_position(target)
            super().update(delta_time)


class PistolBullet(Bullet):
    """A pistol round that hurts enemies and disappears on any hit."""

    def __init__(
        self,
        texture: Texture2D,
        sub_texture_name: str,
        position: Sequence[float],
        size: Sequence[float] = (1.0, 1.0),
        rotation: float = 0.0,
    ) -> None:
        super().__init__(texture, sub_texture_name, position, size, rotation)
        self.collider = Collider(ObjectType.PROJECTILE, position, size)
        self.collider.set_collision_response(ObjectType.ENEMY, ResponseType.OVERLAP)
        self.collider.set_collision_response(ObjectType.CHARACTER, ResponseType.IGNORE)
        self.collider.set_collision_response(ObjectType.STATIC_OBJECT, ResponseType.OVERLAP)
        self.collider.set_collision_response(ObjectType.PROJECTILE, ResponseType.IGNORE)

    def overlap(self, other: Actor) -> None:
        if isinstance(other, Enemy):
            other.hurt(self.damage)
        self.destroy()


class WeaponComponent:
    """A weapon sprite that fires bullets into a world, with a reload delay.

    ``world`` must provide ``spawn_actor`` and may provide ``surface``.
    """

    def __init__(
        self,
        world: Any,
        texture: Texture2D,
        sprite_name: str,
        position: Sequence[float],
        size: Sequence[float],
        rotation: float = 0.0,
    ) -> None:
        self.world = world
        self.sprite = Sprite(texture, sprite_name, position, size, rotation)
        self.weapon_type = WeaponType.PISTOL
        self.damage = self.weapon_type.damage
        self.reload_time = 0.0
        self.active = False

    def shoot(self, target: Sequence[float]) -> Optional[Bullet]:
        """Fire towards a screen point (y down); return the bullet, or None while reloading."""
        if self.reload_time > 0.0 or self.weapon_type is not WeaponType.PISTOL:
            return None
        origin = Vector2(self.sprite.position)
        bullet = self.world.spawn_actor(
            PistolBullet,
            PISTOL_BULLET_SPRITE,
            origin,
            Vector2(self.sprite.size),
            self.sprite.rotation,
        )
        bullet.damage = PISTOL_DAMAGE
        bullet.speed = PISTOL_BULLET_SPEED
        direction = Vector2(target) - origin
        length = direction.length()
        if length > 0.0:
            bullet.move_vector = Vector2(direction.x / length, -direction.y / length)
        self.reload_time = WeaponType.PISTOL.fire_interval
        return bullet

    def update_reload_time(self, delta_time: float) -> None:
        self.reload_time = max(0.0, self.reload_time - delta_time)

    def update(self, delta_time: float) -> None:
        """Count down the reload and draw the weapon."""
        if self.reload_time > 0.0:
            self.update_reload_time(delta_time)
        surface: Optional[pygame.Surface] = getattr(self.world, "surface", None)
        if surface is not None:
            self.sprite.render(surface)

    def follow_owner(self, offset: Sequence[float]) -> None:
        """Move the weapon sprite by ``offset``."""
        self.sprite.position = self.sprite.position + Vector2(offset)