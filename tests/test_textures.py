import pygame
import pytest

from galconquest.textures import TextureManager


@pytest.fixture
def manager(tmp_path):
    return TextureManager(root=tmp_path, font_paths=())


@pytest.fixture
def ship_file(tmp_path):
    surface = pygame.Surface((6, 4))
    surface.fill((10, 20, 30))
    pygame.image.save(surface, str(tmp_path / "ship.bmp"))
    return "ship.bmp"


def test_empty_texture_is_single_white_pixel(manager):
    empty = manager.empty_texture()
    assert empty.get_size() == (1, 1)
    assert tuple(empty.get_at((0, 0))) == (255, 255, 255, 255)


def test_empty_texture_is_shared(manager):
    first = manager.empty_texture()
    first.set_at((0, 0), (1, 2, 3))
    assert tuple(manager.empty_texture().get_at((0, 0)))[:3] == (1, 2, 3)


def test_missing_texture_falls_back_to_empty(manager):
    assert manager.get_texture("nothing-here.png") is manager.empty_texture()


def test_loads_texture_from_root(manager, ship_file):
    texture = manager.get_texture(ship_file)
    assert texture.get_size() == (6, 4)
    assert tuple(texture.get_at((0, 0)))[:3] == (10, 20, 30)


def test_texture_is_cached(manager, ship_file):
    first = manager.get_texture(ship_file)
    first.set_at((0, 0), (200, 100, 50))
    second = manager.get_texture(ship_file)
    assert tuple(second.get_at((0, 0)))[:3] == (200, 100, 50)


def test_clear_textures_forces_reload(manager, ship_file):
    first = manager.get_texture(ship_file)
    manager.clear_textures()
    second = manager.get_texture(ship_file)
    assert first is not second
    assert second.get_size() == first.get_size()


def test_default_font_is_cached(manager):
    first = manager.get_font(24)
    first.set_bold(True)
    assert manager.get_font(24).get_bold() is True


def test_default_font_has_height(manager):
    assert manager.get_font(24).get_height() > 0


def test_missing_font_file_falls_back_to_default(manager):
    assert manager.get_font(24, "missing.ttf") is manager.get_font(24)