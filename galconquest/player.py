"""The player's fighter, with capture and dual-fighter handling."""

from __future__ import annotations

import logging
import math
import time

import pygame
from pygame.math import Vector2

from galconquest.textures import shared_manager

log = logging.getLogger(__name__)

PLAYER_TEXTURE = "assets/player.png"
SCREEN_WIDTH = 800.0
START_POSITION = (400.0, 500.0)
MOVE_SPEED = 5.0
CAPTURE_RISE = 2.0
CAPTURE_EXIT_Y = -50.0

_LEFT_KEYS = (pygame.K_a, pygame.K_LEFT)
_RIGHT_KEYS = (pygame.K_d, pygame.K_RIGHT)


def _is_down(pressed, key):
    try:
        return bool(pressed[key])
    except (KeyError, IndexError):
        return False


class Player:
    """The player's ship."""

    def __init__(self, textures=None):
        manager = textures if textures is not None else shared_manager
        self.texture = manager.get_texture(PLAYER_TEXTURE)
        self.position = Vector2(START_POSITION)
        self.dual_position = Vector2(0.0, 0.0)
        self.health = 3
        self.shoot_cooldown = 0.25
        self.captured = False
        self.has_dual = False
        self.dual_offset = 30.0
        self._last_shot = time.monotonic()
        log.debug("Player initialized at position: %s, %s", *self.position)

    def handle_input(self, pressed):
        """Move according to the key state ``pressed`` and stay on screen."""
        if not self.is_alive() or self.captured:
            return

        if any(_is_down(pressed, key) for key in _LEFT_KEYS):
            self.position.x -= MOVE_SPEED
        if any(_is_down(pressed, key) for key in _RIGHT_KEYS):
            self.position.x += MOVE_SPEED

        width = self.texture.get_width()
        max_x = SCREEN_WIDTH - width
        if self.has_dual:
            max_x -= self.dual_offset

        if self.position.x < 0:
            self.position.x = 0.0
        elif self.position.x + width > max_x:
            self.position.x = max_x

        if self.has_dual:
            self._update_dual_fighter()

    def update(self):
        """Advance one frame; a captured ship rises and costs a life."""
        if not self.captured:
            return
        self.position.y -= CAPTURE_RISE
        if self.position.y < CAPTURE_EXIT_Y:
            self.health -= 1
            if self.health <= 0:
                return
            self.position = Vector2(START_POSITION)
            self.captured = False

    def _update_dual_fighter(self):
        self.dual_position = Vector2(
            self.position.x + self.dual_offset, self.position.y
        )

    def can_shoot(self, now=None):
        """True once the cooldown since the last shot has passed."""
        if now is None:
            now = time.monotonic()
        return now - self._last_shot >= self.shoot_cooldown

    def reset_shoot_clock(self, now=None):
        """Record that a shot was fired at ``now``."""
        self._last_shot = time.monotonic() if now is None else now

    def damage(self, amount):
        """Lose the dual fighter first, otherwise ``amount`` lives."""
        if self.captured:
            return
        if self.has_dual:
            self.has_dual = False
        else:
            self.health = max(0, self.health - amount)

    def capture(self):
        self.captured = True

    def rescue(self):
        """Free a captured ship, which returns as a dual fighter."""
        if self.captured:
            self.captured = False
            self.has_dual = True
            self.position = Vector2(START_POSITION)
            self._update_dual_fighter()

    def is_alive(self):
        return self.health > 0

    def bounds(self):
        """Return the rectangle the main ship covers."""
        width, height = self.texture.get_size()
        return pygame.Rect(
            math.floor(self.position.x), math.floor(self.position.y), width, height
        )

    def draw(self, surface):
        """Blit the ship, and its dual fighter if present, onto ``surface``."""
        surface.blit(self.texture, (self.position.x, self.position.y))
        if self.has_dual:
            surface.blit(self.texture, (self.dual_position.x, self.dual_position.y))