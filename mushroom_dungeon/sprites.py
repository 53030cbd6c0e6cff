"""Sprites drawn from a texture region, and sprites with frame animations."""

from __future__ import annotations

from typing import Dict, List, Optional, Sequence, Tuple

import pygame
from pygame.math import Vector2

from .textures import Texture2D

Frame = Tuple[str, float]


class Sprite:
    """A textured quad with a world position (y up), size and rotation in degrees."""

    def __init__(
        self,
        texture: Texture2D,
        sub_texture_name: str,
        position: Sequence[float] = (0.0, 0.0),
        size: Sequence[float] = (1.0, 1.0),
        rotation: float = 0.0,
    ) -> None:
        self.texture = texture
        self.sub_texture_name = sub_texture_name
        self.position = Vector2(position)
        self.size = Vector2(size)
        self.rotation = float(rotation)

    def set_new_sprite(self, sub_texture_name: str) -> None:
        """Show another region of the texture."""
        self.sub_texture_name = sub_texture_name

    def image(self) -> pygame.Surface:
        """Return the current region scaled to the size and rotated."""
        region = self.texture.region(self.sub_texture_name)
        source = self.texture.surface.subsurface(region)
        width = max(1, round(abs(self.size.x)))
        height = max(1, round(abs(self.size.y)))
        scaled = pygame.transform.scale(source, (width, height))
        if self.rotation:
            scaled = pygame.transform.rotate(scaled, self.rotation)
        return scaled

    def render(self, surface: pygame.Surface) -> pygame.Rect:
        """Draw onto ``surface``, turning world coordinates into screen ones."""
        image = self.image()
        center = (
            self.position.x + self.size.x / 2.0,
            surface.get_height() - (self.position.y + self.size.y / 2.0),
        )
        rect = image.get_rect(center=(round(center[0]), round(center[1])))
        surface.blit(image, rect)
        return rect


class AnimSprite(Sprite):
    """A sprite that cycles through named frame sequences."""

    def __init__(
        self,
        texture: Texture2D,
        sub_texture_name: str,
        position: Sequence[float] = (0.0, 0.0),
        size: Sequence[float] = (1.0, 1.0),
        rotation: float = 0.0,
    ) -> None:
        super().__init__(texture, sub_texture_name, position, size, rotation)
        self._states: Dict[str, List[Frame]] = {}
        self.current_state: Optional[str] = None
        self.current_frame = 0
        self._anim_time = 0.0
        self._dirty = False

    def insert_state(self, state: str, frames: Sequence[Frame]) -> None:
        """Add an animation state; an existing state is left unchanged."""
        frame_list = [(name, float(duration)) for name, duration in frames]
        if not frame_list:
            raise ValueError(f"state {state!r} has no frames")
        if any(duration <= 0.0 for _, duration in frame_list):
            raise ValueError(f"state {state!r} has a frame without positive duration")
        self._states.setdefault(state, frame_list)

    def set_state(self, state: str) -> None:
        """Switch to a state, restarting it unless it is already playing."""
        if state not in self._states:
            raise KeyError(f"Cant find state: {state}")
        if self.current_state != state:
            self.current_state = state
            self.current_frame = 0
            self._anim_time = 0.0
            self._dirty = True

    def update(self, delta_time: float) -> None:
        """Advance the animation clock by ``delta_time`` seconds."""
        if self.current_state is None:
            return
        frames = self._states[self.current_state]
        self._anim_time += delta_time
        while self._anim_time >= frames[self.current_frame][1]:
            self._anim_time -= frames[self.current_frame][1]
            self.current_frame = (self.current_frame + 1) % len(frames)
            self._dirty = True

    def render(self, surface: pygame.Surface) -> pygame.Rect:
        if self._dirty and self.current_state is not None:
            self.sub_texture_name = self._states[self.current_state][self.current_frame][0]
            self._dirty = False
        return super().render(surface)