"""Player health with a row of heart icons."""

from __future__ import annotations

import logging
from typing import Callable, List, Optional

import pygame
from pygame.math import Vector2

from .sprites import Sprite
from .textures import Texture2D

logger = logging.getLogger(__name__)

HEART_SIZE = Vector2(32.0, 32.0)
HEART_OFFSET = Vector2(40.0, 0.0)
INVULNERABILITY_TIME = 1.0
FULL_HEART = "fullHeart"
EMPTY_HEART = "emptyHeart"


class HealthComponent:
    """Tracks health, a short invulnerability after a hit, and heart icons."""

    def __init__(
        self,
        health: int,
        texture: Texture2D,
        screen_height: float,
        on_death: Optional[Callable[[], None]] = None,
    ) -> None:
        self.max_health = health
        self.health = health - 2
        self.invulnerability_time = 0.0
        self._on_death = on_death
        origin = Vector2(10.0, screen_height - 50.0)
        self.hearts: List[Sprite] = [
            Sprite(texture, FULL_HEART, HEART_OFFSET * index + origin, HEART_SIZE)
            for index in range(self.max_health)
        ]
        self.update_hearts()

    def hurt(self, damage: int) -> None:
        """Take damage; reaching zero calls ``on_death``, otherwise grants invulnerability."""
        self.health = max(0, self.health - damage)
        if self.health == 0:
            if self._on_death is not None:
                self._on_death()
        else:
            self.invulnerability_time = INVULNERABILITY_TIME
        self.update_hearts()
        logger.debug("health: %d", self.health)

    def heal(self, amount: int) -> None:
        """Restore health up to the maximum."""
        self.health = min(self.max_health, self.health + amount)
        self.update_hearts()

    def update_invulnerability(self, delta_time: float) -> None:
        self.invulnerability_time = max(0.0, self.invulnerability_time - delta_time)

    def update_hearts(self) -> None:
        """Show full hearts up to the current health and empty ones after."""
        for index, heart in enumerate(self.hearts):
            heart.set_new_sprite(FULL_HEART if self.health >= index else EMPTY_HEART)

    def render(self, surface: pygame.Surface) -> List[pygame.Rect]:
        """Draw every heart and return the screen rectangles drawn."""
        return [heart.render(surface) for heart in self.hearts]