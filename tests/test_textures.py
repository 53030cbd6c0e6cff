import pygame

from mushroom_dungeon.textures import SubTexture, Texture2D


def make_texture():
    surface = pygame.Surface((32, 16))
    surface.fill((255, 0, 0), pygame.Rect(0, 0, 16, 16))
    surface.fill((0, 0, 255), pygame.Rect(16, 0, 16, 16))
    return Texture2D(surface)


def test_dimensions_come_from_surface():
    texture = make_texture()
    assert (texture.width, texture.height) == (32, 16)


def test_missing_sub_texture_is_whole_texture():
    texture = make_texture()
    sub = texture.sub_texture("nothing")
    assert sub == SubTexture()
    assert texture.region("nothing") == pygame.Rect(0, 0, 32, 16)


def test_region_of_right_half():
    texture = make_texture()
    texture.add_sub_texture("blue", (0.5, 0.0), (1.0, 1.0))
    rect = texture.region("blue")
    assert rect == pygame.Rect(16, 0, 16, 16)
    assert texture.surface.get_at(rect.topleft)[:3] == (0, 0, 255)


def test_region_uses_bottom_left_origin():
    surface = pygame.Surface((16, 32))
    texture = Texture2D(surface)
    texture.add_sub_texture("low", (0.0, 0.0), (1.0, 0.5))
    texture.add_sub_texture("high", (0.0, 0.5), (1.0, 1.0))
    assert texture.region("low").top == texture.region("high").bottom
    assert texture.region("high").top == 0


def test_add_sub_texture_keeps_first():
    texture = make_texture()
    texture.add_sub_texture("a", (0.0, 0.0), (0.5, 1.0))
    texture.add_sub_texture("a", (0.5, 0.0), (1.0, 1.0))
    sub = texture.sub_texture("a")
    assert tuple(sub.right_upper_uv) == (0.5, 1.0)