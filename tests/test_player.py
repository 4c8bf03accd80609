import pygame
import pytest

from galconquest.player import MOVE_SPEED, SCREEN_WIDTH, START_POSITION, Player
from galconquest.textures import TextureManager


@pytest.fixture
def player(tmp_path):
    return Player(TextureManager(root=tmp_path, font_paths=()))


def _run_until_free(player, limit=2000):
    for _ in range(limit):
        player.update()
        if not player.captured:
            return


def test_initial_state(player):
    assert player.position == START_POSITION
    assert player.health == 3
    assert player.is_alive()
    assert not player.captured and not player.has_dual


def test_move_left(player):
    player.handle_input({pygame.K_LEFT: True})
    assert player.position.x == START_POSITION[0] - MOVE_SPEED


def test_move_right_with_d(player):
    player.handle_input({pygame.K_d: True})
    assert player.position.x == START_POSITION[0] + MOVE_SPEED


def test_no_keys_no_move(player):
    player.handle_input({})
    assert player.position == START_POSITION


def test_clamped_at_left_edge(player):
    player.position.x = 2.0
    player.handle_input({pygame.K_a: True})
    assert player.position.x == 0.0


def test_clamped_at_right_edge(player):
    player.position.x = SCREEN_WIDTH - 1
    player.handle_input({pygame.K_RIGHT: True})
    assert player.position.x + player.texture.get_width() <= SCREEN_WIDTH


def test_captured_ignores_input(player):
    player.capture()
    player.handle_input({pygame.K_LEFT: True})
    assert player.position == START_POSITION


def test_damage_reduces_health_not_below_zero(player):
    player.damage(1)
    assert player.health == 2
    player.damage(10)
    assert player.health == 0
    assert not player.is_alive()


def test_dual_absorbs_damage(player):
    player.capture()
    player.rescue()
    player.damage(1)
    assert not player.has_dual
    assert player.health == 3


def test_damage_ignored_while_captured(player):
    player.capture()
    player.damage(1)
    assert player.health == 3


def test_capture_costs_a_life_and_resets(player):
    player.capture()
    _run_until_free(player)
    assert not player.captured
    assert player.health == 2
    assert player.position == START_POSITION


def test_capture_on_last_life_ends_game(player):
    player.health = 1
    player.capture()
    _run_until_free(player)
    assert player.captured
    assert not player.is_alive()


def test_rescue_gives_dual_fighter(player):
    player.capture()
    player.rescue()
    assert player.has_dual
    assert not player.captured
    assert player.dual_position.x == player.position.x + player.dual_offset
    assert player.dual_position.y == player.position.y


def test_rescue_without_capture_does_nothing(player):
    player.rescue()
    assert not player.has_dual


def test_dual_follows_movement(player):
    player.capture()
    player.rescue()
    player.handle_input({pygame.K_LEFT: True})
    assert player.dual_position.x == player.position.x + player.dual_offset


def test_shoot_cooldown(player):
    player.reset_shoot_clock(100.0)
    assert not player.can_shoot(100.0 + player.shoot_cooldown / 2)
    assert player.can_shoot(100.0 + player.shoot_cooldown)


def test_bounds_and_draw(player):
    assert player.bounds().topleft == (400, 500)
    target = pygame.Surface((800, 600))
    target.fill((0, 0, 0))
    player.draw(target)
    assert tuple(target.get_at((400, 500)))[:3] == (255, 255, 255)