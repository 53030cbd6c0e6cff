"""Enemies: a base enemy that can be hurt, and a melee enemy that patrols."""

from __future__ import annotations

from typing import List, Sequence

from pygame.math import Vector2

from .actor import Pawn
from .physics import Collider, ObjectType, ResponseType, can_move
from .textures import Texture2D

PATROL_TOLERANCE = 0.2


class Enemy(Pawn):
    """A pawn that deals damage on contact and dies when its health runs out."""

    health: int = 1
    overlap_damage: int = 1

    def move(self, delta_time: float) -> None:
        """A plain enemy does not move by itself."""

    def point_reached(self) -> None:
        """Hook called when a patrol point is reached."""

    def change_patrol_points_coordinate(self, value: Sequence[float]) -> None:
        """Hook for shifting patrol points along with the world."""

    def set_patrol_points(self, points: Sequence[Sequence[float]]) -> None:
        """Hook for giving the enemy a patrol route."""

    def hurt(self, damage: int) -> None:
        """Lose health; an enemy whose health would reach zero is destroyed."""
        if self.health - damage <= 0:
            self.destroy()
        else:
            self.health -= damage


class MeleeEnemy(Enemy):
    """An enemy that walks back and forth along a list of patrol points."""

    def __init__(
        self,
        texture: Texture2D,
        sub_texture_name: str,
        position: Sequence[float] = (0.0, 0.0),
        size: Sequence[float] = (1.0, 1.0),
        rotation: float = 0.0,
        move_speed: float = 0.0,
    ) -> None:
        super().__init__(texture, sub_texture_name, position, size, rotation, move_speed)
        self.patrol_points: List[Vector2] = []
        self.current_patrol_point = Vector2(position)
        self.patrol_direction = 1
        self.index = 0
        self.collider = Collider(ObjectType.ENEMY, position, size)
        self.collider.set_collision_response(ObjectType.CHARACTER, ResponseType.OVERLAP)
        self.collider.set_collision_response(ObjectType.ENEMY, ResponseType.IGNORE)
        self.health = 1

    def move(self, delta_time: float) -> None:
        """Walk towards the current patrol point, or pick the next one on arrival."""
        to_point = self.current_patrol_point - self.position
        length = to_point.length()
        if length < PATROL_TOLERANCE:
            if self.patrol_points:
                self.point_reached()
                self.current_patrol_point = Vector2(self.patrol_points[self.index])
            return
        self.move_vector = to_point / length
        target = self.position + self.move_vector * delta_time * self.move_speed
        if can_move(self, target, self.actors):
            self.set_position(target)

    def point_reached(self) -> None:
        """Advance to the next patrol index, turning round at either end."""
        count = len(self.patrol_points)
        if count < 2:
            self.index = 0
            return
        following = self.index + self.patrol_direction
        if following >= count or following < 0:
            self.patrol_direction *= -1
        self.index += self.patrol_direction

    def change_patrol_points_coordinate(self, value: Sequence[float]) -> None:
        """Shift every patrol point and the current target by ``value``."""
        offset = Vector2(value)
        self.patrol_points = [point + offset for point in self.patrol_points]
        self.current_patrol_point += offset

    def set_patrol_points(self, points: Sequence[Sequence[float]]) -> None:
        """Replace the patrol route and aim at the point at the current index."""
        self.patrol_points = [Vector2(point) for point in points]
        if self.patrol_points:
            if self.index >= len(self.patrol_points):
                self.index = 0
            self.current_patrol_point = Vector2(self.patrol_points[self.index])