import pygame
import pytest
from pygame.math import Vector2

from mushroom_dungeon.resources import (
    ATLAS_NAME,
    ATLAS_PATH,
    SUB_TEXTURE_NAMES,
    TILE_SIZE,
    ResourceNotFoundError,
    Resources,
)
from mushroom_dungeon.sprites import AnimSprite


def _surface(width, height, color=(200, 10, 10)):
    surface = pygame.Surface((width, height))
    surface.fill(color)
    return surface


def test_from_executable_posix_path():
    resources = Resources.from_executable("/opt/game/bin/app")
    assert str(resources.base_path) == "/opt/game/bin"


def test_from_executable_backslash_path():
    resources = Resources.from_executable("C:\\game\\app.exe")
    assert str(resources.base_path) == "C:\\game"


def test_from_executable_without_separator_keeps_whole_string():
    resources = Resources.from_executable("app")
    assert str(resources.base_path) == "app"


def test_add_texture_and_lookup_round_trip():
    resources = Resources(".")
    texture = resources.add_texture("atlas", _surface(32, 32))
    assert resources.texture("atlas") is texture
    assert (texture.width, texture.height) == (32, 32)


def test_add_texture_keeps_first_registration():
    resources = Resources(".")
    first = resources.add_texture("atlas", _surface(32, 32))
    second = resources.add_texture("atlas", _surface(8, 8))
    assert second is first
    assert resources.texture("atlas").width == 32


def test_missing_texture_raises():
    with pytest.raises(ResourceNotFoundError):
        Resources(".").texture("nothing")


def test_slice_atlas_tiles_have_tile_size():
    resources = Resources(".")
    texture = resources.add_texture("atlas", _surface(32, 32))
    names = ["a", "b", "c", "d"]
    resources.slice_atlas(texture, names, 16, 16)
    for name in names:
        assert texture.region(name).size == (16, 16)
    regions = {tuple(texture.region(name)) for name in names}
    assert len(regions) == len(names)


def test_slice_atlas_fills_rows_left_to_right_from_top():
    resources = Resources(".")
    texture = resources.add_texture("atlas", _surface(32, 32))
    resources.slice_atlas(texture, ["a", "b", "c"], 16, 16)
    a, b, c = (texture.region(name) for name in "abc")
    assert a.topleft == (0, 0)
    assert b.left == a.right and b.top == a.top
    assert c.left == a.left and c.top == a.bottom


def test_slice_atlas_first_tile_uv():
    resources = Resources(".")
    texture = resources.add_texture("atlas", _surface(32, 32))
    resources.slice_atlas(texture, ["a"], 16, 16)
    sub = texture.sub_texture("a")
    assert sub.left_bottom_uv == Vector2(0.0, 0.5)
    assert sub.right_upper_uv == Vector2(0.5, 1.0)


def test_slice_atlas_rejects_zero_size():
    resources = Resources(".")
    texture = resources.add_texture("atlas", _surface(32, 32))
    with pytest.raises(ValueError):
        resources.slice_atlas(texture, ["a"], 0, 16)


def test_load_texture_from_file(tmp_path):
    pygame.image.save(_surface(24, 8), str(tmp_path / "tex.bmp"))
    resources = Resources(tmp_path)
    texture = resources.load_texture("tex", "tex.bmp")
    assert (texture.width, texture.height) == (24, 8)
    assert resources.texture("tex") is texture


def test_load_texture_missing_file_raises(tmp_path):
    with pytest.raises(ResourceNotFoundError):
        Resources(tmp_path).load_texture("tex", "missing.bmp")


def test_load_texture_atlas_from_file(tmp_path):
    pygame.image.save(_surface(32, 16), str(tmp_path / "atlas.bmp"))
    resources = Resources(tmp_path)
    texture = resources.load_texture_atlas("atlas", "atlas.bmp", ["x", "y"], 16, 16)
    assert texture.region("x").size == (16, 16)
    assert texture.region("y").left == texture.region("x").right


def test_load_sprite_round_trip():
    resources = Resources(".")
    resources.add_texture("atlas", _surface(32, 32))
    sprite = resources.load_sprite("hero", "atlas", 20, 30, "a")
    assert resources.sprite("hero") is sprite
    assert sprite.size == Vector2(20, 30)
    assert sprite.sub_texture_name == "a"


def test_load_sprite_missing_texture_raises():
    with pytest.raises(ResourceNotFoundError):
        Resources(".").load_sprite("hero", "atlas", 20, 30, "a")


def test_missing_sprite_raises():
    with pytest.raises(ResourceNotFoundError):
        Resources(".").sprite("hero")


def test_load_anim_sprite_round_trip():
    resources = Resources(".")
    resources.add_texture("atlas", _surface(32, 32))
    sprite = resources.load_anim_sprite("walker", "atlas", 10, 12, "a")
    assert resources.anim_sprite("walker") is sprite
    assert isinstance(sprite, AnimSprite) and sprite.size == Vector2(10, 12)


def test_missing_anim_sprite_raises():
    with pytest.raises(ResourceNotFoundError):
        Resources(".").anim_sprite("walker")


def test_load_all_slices_every_name(tmp_path):
    atlas_file = tmp_path / ATLAS_PATH
    atlas_file.parent.mkdir(parents=True)
    pygame.image.save(_surface(64, 48), str(atlas_file))
    resources = Resources(tmp_path)
    texture = resources.load_all()
    assert resources.texture(ATLAS_NAME) is texture
    regions = {tuple(texture.region(name)) for name in SUB_TEXTURE_NAMES}
    assert len(regions) == len(SUB_TEXTURE_NAMES)
    for name in SUB_TEXTURE_NAMES:
        assert texture.region(name).size == (TILE_SIZE, TILE_SIZE)