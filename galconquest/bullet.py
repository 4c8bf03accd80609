"""Shots fired by the player."""

from __future__ import annotations

import functools
import math
import os

import pygame
from pygame.math import Vector2

BULLET_TEXTURE = "assets/bullet.png"
BULLET_SPEED = 10.0


@functools.lru_cache(maxsize=None)
def _load_texture(path):
    try:
        return pygame.image.load(path)
    except (OSError, pygame.error) as exc:
        raise RuntimeError("Failed to load bullet texture!") from exc


class Bullet:
    """A bullet travelling straight up the screen."""

    def __init__(self, x, y, texture=None):
        if texture is None:
            texture = _load_texture(os.path.abspath(BULLET_TEXTURE))
        self.texture = texture
        self.position = Vector2(x, y)

    def update(self):
        """Advance the bullet by one frame."""
        self.position.y -= BULLET_SPEED

    def draw(self, surface):
        """Blit the bullet onto ``surface``."""
        surface.blit(self.texture, (self.position.x, self.position.y))

    def bounds(self):
        """Return the rectangle the bullet covers."""
        width, height = self.texture.get_size()
        return pygame.Rect(
            math.floor(self.position.x), math.floor(self.position.y), width, height
        )