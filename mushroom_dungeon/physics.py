"""Collision types, colliders and the axis-aligned collision queries."""

from __future__ import annotations

import enum
from typing import Any, Iterable, Optional, Sequence

from pygame.math import Vector2


class ResponseType(enum.Enum):
    """How a collider reacts to another kind of object."""

    IGNORE = 0
    OVERLAP = 1
    BLOCK = 2


class ObjectType(enum.Enum):
    """Kinds of objects a collider can belong to."""

    CHARACTER = 0
    ENEMY = 1
    STATIC_OBJECT = 2
    PROJECTILE = 3
    DYNAMIC_OBJECT = 4
    INTERACTIVE_OBJECT = 5


_DEFAULT_RESPONSES = {
    ObjectType.ENEMY: ResponseType.BLOCK,
    ObjectType.CHARACTER: ResponseType.BLOCK,
    ObjectType.STATIC_OBJECT: ResponseType.BLOCK,
    ObjectType.PROJECTILE: ResponseType.OVERLAP,
    ObjectType.DYNAMIC_OBJECT: ResponseType.BLOCK,
    ObjectType.INTERACTIVE_OBJECT: ResponseType.IGNORE,
}


class Collider:
    """An axis-aligned box with per-object-type collision responses."""

    def __init__(
        self,
        object_type: ObjectType,
        position: Sequence[float],
        size: Sequence[float] = (100.0, 100.0),
    ) -> None:
        self.object_type = object_type
        self.position = Vector2(position)
        self.size = Vector2(size)
        self._responses = dict(_DEFAULT_RESPONSES)

    def set_collision_response(
        self, object_type: ObjectType, response_type: ResponseType
    ) -> None:
        """Set how this collider responds to objects of the given type."""
        self._responses[object_type] = response_type

    def response_to(self, object_type: ObjectType) -> ResponseType:
        """Return the response towards objects of the given type."""
        return self._responses.setdefault(object_type, ResponseType.IGNORE)

    def owner(self, actors: Iterable[Any]) -> Optional[Any]:
        """Return the actor among ``actors`` that holds this collider."""
        for actor in actors:
            if getattr(actor, "collider", None) is self:
                return actor
        return None


def _touches(
    other_position: Vector2,
    position: Vector2,
    size: Vector2,
    other_size: Vector2,
) -> bool:
    ox, oy = other_position.x, other_position.y
    px, py = position.x, position.y
    osx, osy = other_size.x, other_size.y
    sx, sy = size.x, size.y

    vertical = (
        (oy >= py and oy + osy <= py + sy)
        or (oy + osy >= py and oy <= py)
        or (oy + osy >= py + sy and oy <= py + sy)
    )
    left_edge_inside = px <= ox <= px + sx
    covers_left_edge = ox + osx >= px and ox <= px
    return (left_edge_inside or covers_left_edge) and vertical


def is_overlap(
    other_position: Sequence[float],
    check_position: Sequence[float],
    check_size: Sequence[float],
    other_size: Sequence[float],
    check_collider: Collider,
    other_collider: Collider,
) -> bool:
    """True if the boxes touch and the checked collider overlaps the other's type."""
    return (
        _touches(
            Vector2(other_position),
            Vector2(check_position),
            Vector2(check_size),
            Vector2(other_size),
        )
        and check_collider.response_to(other_collider.object_type)
        is ResponseType.OVERLAP
    )


def is_blocking(
    other_position: Sequence[float],
    next_position: Sequence[float],
    check_size: Sequence[float],
    other_size: Sequence[float],
    check_collider: Collider,
    other_collider: Collider,
) -> bool:
    """True if the boxes touch and the checked collider is blocked by the other's type."""
    return (
        _touches(
            Vector2(other_position),
            Vector2(next_position),
            Vector2(check_size),
            Vector2(other_size),
        )
        and check_collider.response_to(other_collider.object_type)
        is ResponseType.BLOCK
    )


def can_move(actor: Any, next_position: Sequence[float], actors: Iterable[Any]) -> bool:
    """Return whether ``actor`` may move to ``next_position`` without being blocked."""
    check_collider: Collider = actor.collider
    for other in actors:
        other_collider: Optional[Collider] = other.collider
        if other_collider is None:
            continue
        if is_blocking(
            other.position,
            next_position,
            check_collider.size,
            other_collider.size,
            check_collider,
            other_collider,
        ):
            return False
    return True


def check_overlapping(collider: Collider, actors: Iterable[Any]) -> Optional[Any]:
    """Notify the collider's owner of the first actor it overlaps.

    Returns the overlapped actor, or None when nothing overlaps.
    """
    actor_list = list(actors)
    for other in actor_list:
        other_collider: Optional[Collider] = other.collider
        if other_collider is None:
            continue
        if is_overlap(
            other_collider.position,
            collider.position,
            collider.size,
            other_collider.size,
            collider,
            other_collider,
        ):
            owner = collider.owner(actor_list)
            if owner is not None:
                owner.overlap(other)
            return other
    return None