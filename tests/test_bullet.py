import pygame
import pytest

from galconquest.bullet import BULLET_SPEED, Bullet


@pytest.fixture
def texture():
    surface = pygame.Surface((4, 8))
    surface.fill((255, 0, 0))
    return surface


def test_starts_at_given_position(texture):
    bullet = Bullet(12.0, 300.0, texture)
    assert bullet.position == (12.0, 300.0)


def test_update_moves_up(texture):
    bullet = Bullet(12.0, 300.0, texture)
    bullet.update()
    assert bullet.position.y == 300.0 - BULLET_SPEED
    assert bullet.position.x == 12.0


def test_repeated_updates_keep_moving_up(texture):
    bullet = Bullet(0.0, 300.0, texture)
    previous = bullet.position.y
    for _ in range(5):
        bullet.update()
        assert bullet.position.y < previous
        previous = bullet.position.y


def test_bounds_match_texture(texture):
    bullet = Bullet(20.0, 40.0, texture)
    rect = bullet.bounds()
    assert rect.topleft == (20, 40)
    assert rect.size == texture.get_size()


def test_draw_blits_at_position(texture):
    target = pygame.Surface((50, 50))
    target.fill((0, 0, 0))
    Bullet(5.0, 5.0, texture).draw(target)
    assert tuple(target.get_at((5, 5)))[:3] == (255, 0, 0)
    assert tuple(target.get_at((0, 0)))[:3] == (0, 0, 0)


def test_missing_texture_file_raises(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    with pytest.raises(RuntimeError, match="Failed to load bullet texture!"):
        Bullet(0.0, 0.0)