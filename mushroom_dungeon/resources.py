"""Loading and lookup of textures, atlases and sprites by name."""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Sequence, Union

import pygame

from .sprites import AnimSprite, Sprite
from .textures import Texture2D

ATLAS_NAME = "textureAtlas"
ATLAS_PATH = "resources/textures/mushroom.png"
SUB_TEXTURE_NAMES = (
    "mush1",
    "mush2",
    "mush3",
    "wall",
    "fullHeart",
    "emptyHeart",
    "heal",
    "pistolBullet",
    "pistol",
    "bomb",
)
TILE_SIZE = 16


class ResourceNotFoundError(LookupError):
    """Raised when a named resource or a resource file cannot be found."""


class Resources:
    """Named textures, sprites and animated sprites, loaded relative to a base path."""

    def __init__(self, base_path: Union[str, Path]) -> None:
        self.base_path = Path(base_path)
        self._textures: Dict[str, Texture2D] = {}
        self._sprites: Dict[str, Sprite] = {}
        self._anim_sprites: Dict[str, AnimSprite] = {}

    @staticmethod
    def from_executable(executable_path: str) -> "Resources":
        """Create resources rooted at the directory holding the executable."""
        cut = max(executable_path.rfind("/"), executable_path.rfind("\\"))
        base = executable_path if cut < 0 else executable_path[:cut]
        return Resources(base)

    def load_texture(self, name: str, path: Union[str, Path]) -> Texture2D:
        """Load an image file as a texture; an existing name keeps its texture."""
        full_path = self.base_path / path
        try:
            surface = pygame.image.load(str(full_path))
        except (OSError, pygame.error) as exc:
            raise ResourceNotFoundError(f"Cant load the texture: {name} ({full_path})") from exc
        return self.add_texture(name, surface)

    def add_texture(self, name: str, surface: pygame.Surface) -> Texture2D:
        """Register a surface as a texture; an existing name keeps its texture."""
        return self._textures.setdefault(name, Texture2D(surface))

    def texture(self, name: str) -> Texture2D:
        """Return the texture registered under ``name``."""
        try:
            return self._textures[name]
        except KeyError:
            raise ResourceNotFoundError(f"Cant find the texture: {name}") from None

    def load_texture_atlas(
        self,
        name: str,
        path: Union[str, Path],
        sub_texture_names: Sequence[str],
        width: int,
        height: int,
    ) -> Texture2D:
        """Load a texture and cut it into equally sized named tiles."""
        texture = self.load_texture(name, path)
        self.slice_atlas(texture, sub_texture_names, width, height)
        return texture

    def slice_atlas(
        self,
        texture: Texture2D,
        sub_texture_names: Sequence[str],
        width: int,
        height: int,
    ) -> Texture2D:
        """Name tiles left to right, top row first, each ``width`` by ``height``."""
        if width <= 0 or height <= 0:
            raise ValueError("tile width and height must be positive")
        tex_width, tex_height = texture.width, texture.height
        offset_x = 0
        offset_y = tex_height
        for sub_name in sub_texture_names:
            left_bottom = (offset_x / tex_width, (offset_y - height) / tex_height)
            right_top = ((offset_x + width) / tex_width, offset_y / tex_height)
            texture.add_sub_texture(sub_name, left_bottom, right_top)
            offset_x += width
            if offset_x >= tex_width:
                offset_x = 0
                offset_y -= height
        return texture

    def load_sprite(
        self,
        sprite_name: str,
        texture_name: str,
        width: int,
        height: int,
        sub_texture_name: str,
    ) -> Sprite:
        """Create a sprite from a loaded texture; an existing name keeps its sprite."""
        texture = self.texture(texture_name)
        sprite = Sprite(texture, sub_texture_name, (0.0, 0.0), (width, height))
        return self._sprites.setdefault(sprite_name, sprite)

    def sprite(self, name: str) -> Sprite:
        """Return the sprite registered under ``name``."""
        try:
            return self._sprites[name]
        except KeyError:
            raise ResourceNotFoundError(f"Cant find the sprite: {name}") from None

    def load_anim_sprite(
        self,
        sprite_name: str,
        texture_name: str,
        width: int,
        height: int,
        sub_texture_name: str,
    ) -> AnimSprite:
        """Create an animated sprite; an existing name keeps its sprite."""
        texture = self.texture(texture_name)
        sprite = AnimSprite(texture, sub_texture_name, (0.0, 0.0), (width, height))
        return self._anim_sprites.setdefault(sprite_name, sprite)

    def anim_sprite(self, name: str) -> AnimSprite:
        """Return the animated sprite registered under ``name``."""
        try:
            return self._anim_sprites[name]
        except KeyError:
            raise ResourceNotFoundError(f"Cant find the anim sprite: {name}") from None

    def load_all(self) -> Texture2D:
        """Load the game's texture atlas and return it."""
        return self.load_texture_atlas(
            ATLAS_NAME, ATLAS_PATH, SUB_TEXTURE_NAMES, TILE_SIZE, TILE_SIZE
        )