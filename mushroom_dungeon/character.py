"""The player's character: movement, input, health and weapon."""

from __future__ import annotations

from typing import Any, Optional, Sequence

from pygame.math import Vector2

from .actor import Actor, Pawn
from .controllers import InputAction, Key, movement_for_key
from .enemies import Enemy
from .health import HEART_OFFSET, HealthComponent
from .objects import HealActor
from .physics import Collider, ObjectType, ResponseType, can_move
from .textures import Texture2D
from .weapons import Bullet, WeaponComponent

CHARACTER_HEALTH = 10
LEFT_MOUSE_BUTTON = 1
WEAPON_SPRITE = "pistol"
_HUD_MARGIN = Vector2(10.0, 50.0)
_DEFAULT_SCREEN_HEIGHT = 720.0


class MainCharacter(Pawn):
    """The player's pawn.

    It stays where it is on screen: walking moves every other actor the
    opposite way instead.
    """

    def __init__(
        self,
        texture: Texture2D,
        sub_texture_name: str,
        position: Sequence[float] = (0.0, 0.0),
        size: Sequence[float] = (100.0, 100.0),
        rotation: float = 0.0,
        move_speed: float = 0.0,
    ) -> None:
        self.weapon: Optional[WeaponComponent] = None
        super().__init__(texture, sub_texture_name, position, size, rotation, move_speed)
        self.collider = Collider(ObjectType.CHARACTER, position, size)
        self.collider.set_collision_response(ObjectType.ENEMY, ResponseType.OVERLAP)
        self.collider.set_collision_response(ObjectType.CHARACTER, ResponseType.IGNORE)
        self.collider.set_collision_response(ObjectType.PROJECTILE, ResponseType.IGNORE)
        self.collider.set_collision_response(
            ObjectType.INTERACTIVE_OBJECT, ResponseType.OVERLAP
        )
        self.paused = False
        self.ignore_move_input = False
        self.health = HealthComponent(
            CHARACTER_HEALTH, texture, _DEFAULT_SCREEN_HEIGHT, self._on_death
        )
        start = Vector2(position)
        extent = Vector2(size)
        self.weapon = WeaponComponent(
            self.world, texture, WEAPON_SPRITE, start + extent / 2.0, extent / 4.0, rotation
        )

    @property
    def world(self) -> Any:
        return self._world

    @world.setter
    def world(self, value: Any) -> None:
        self._world = value
        if self.weapon is not None:
            self.weapon.world = value

    def _on_death(self) -> None:
        if self.world is not None:
            self.world.game_over = True

    def begin_play(self) -> None:
        """Place the heart icons along the top of the world's screen."""
        screen_size = getattr(self.world, "screen_size", None)
        if screen_size is None:
            return
        origin = Vector2(_HUD_MARGIN.x, screen_size[1] - _HUD_MARGIN.y)
        for index, heart in enumerate(self.health.hearts):
            heart.position = HEART_OFFSET * index + origin

    def update(self, delta_time: float) -> None:
        self.move(delta_time)
        Actor.update(self, delta_time)
        if self.health.invulnerability_time > 0.0:
            self.health.update_invulnerability(delta_time)
        surface = getattr(self.world, "surface", None)
        if surface is not None:
            self.health.render(surface)
        if self.weapon is not None:
            self.weapon.update(delta_time)

    def move(self, delta_time: float) -> None:
        """Scroll the world instead of moving, unless the step is blocked."""
        if self.ignore_move_input or self.move_vector == Vector2(0.0, 0.0):
            return
        step = self.move_vector * delta_time * self.move_speed
        if self.world is not None and can_move(self, self.position + step, self.actors):
            self.world.move_all_actors(step)

    def change_move_vector(self, value: Sequence[float]) -> None:
        self.move_vector += Vector2(value)

    def handle_key(self, key: Key, action: InputAction) -> bool:
        """Apply a key event; return True when the player asks to quit."""
        if action is InputAction.PRESS:
            if key is Key.ESCAPE:
                return True
            if self.ignore_move_input:
                return False
        delta = movement_for_key(key, action)
        if delta != Vector2(0.0, 0.0):
            self.change_move_vector(delta)
        return False

    def handle_mouse(
        self, button: int, action: InputAction, cursor_position: Sequence[float]
    ) -> Optional[Bullet]:
        """Fire at the cursor on any left-button event; return the bullet fired."""
        if button != LEFT_MOUSE_BUTTON or self.weapon is None:
            return None
        if action in (InputAction.PRESS, InputAction.RELEASE, InputAction.REPEAT):
            return self.weapon.shoot(cursor_position)
        return None

    def overlap(self, other: Actor) -> None:
        """Take damage from enemies and pick up heals."""
        if self.health.invulnerability_time <= 0.0 and isinstance(other, Enemy):
            self.health.hurt(other.overlap_damage)
            return
        if isinstance(other, HealActor):
            self.health.heal(other.heal_value)
            other.destroy()