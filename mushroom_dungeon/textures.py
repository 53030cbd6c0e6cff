"""Textures and named sub-regions of a texture atlas."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Sequence

import pygame
from pygame.math import Vector2

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SubTexture:
    """A region of a texture in UV space, with the origin at the bottom left."""

    left_bottom_uv: Vector2 = Vector2(0.0, 0.0)
    right_upper_uv: Vector2 = Vector2(1.0, 1.0)


class Texture2D:
    """An image surface plus a table of named sub-textures."""

    def __init__(self, surface: pygame.Surface) -> None:
        self.surface = surface
        self.width, self.height = surface.get_size()
        self._sub_textures: Dict[str, SubTexture] = {}

    def add_sub_texture(
        self,
        name: str,
        left_bottom_uv: Sequence[float],
        right_upper_uv: Sequence[float],
    ) -> None:
        """Register a named region; an existing name keeps its first region."""
        self._sub_textures.setdefault(
            name, SubTexture(Vector2(left_bottom_uv), Vector2(right_upper_uv))
        )

    def sub_texture(self, name: str) -> SubTexture:
        """Return the named region, or the whole texture when it is unknown."""
        try:
            return self._sub_textures[name]
        except KeyError:
            logger.warning("Cant find subtexture: %s", name)
            return SubTexture()

    def region(self, name: str) -> pygame.Rect:
        """Return the pixel rectangle of the named region on the surface."""
        sub = self.sub_texture(name)
        left = round(sub.left_bottom_uv.x * self.width)
        right = round(sub.right_upper_uv.x * self.width)
        top = round((1.0 - sub.right_upper_uv.y) * self.height)
        bottom = round((1.0 - sub.left_bottom_uv.y) * self.height)
        rect = pygame.Rect(left, top, right - left, bottom - top)
        return rect.clip(self.surface.get_rect())