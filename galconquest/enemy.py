"""Enemy ships: flying into formation and attack runs."""

from __future__ import annotations

import enum
import logging
import math

import pygame
from pygame.math import Vector2

from galconquest.textures import shared_manager

log = logging.getLogger(__name__)

SPAWN_Y = -50.0
FORMATION_SPEED = 3.0
SNAP_DISTANCE = 2.0
FRAME_TIME = 0.016
ARENA_LEFT = -50.0
ARENA_RIGHT = 850.0
ARENA_TOP = -50.0
ARENA_BOTTOM = 600.0


class EnemyType(enum.Enum):
    BASIC = "basic"
    BOSS = "boss"
    CHALLENGING = "challenging"

    @property
    def texture_path(self):
        if self is EnemyType.BOSS:
            return "assets/boss_enemy.png"
        if self is EnemyType.CHALLENGING:
            return "assets/challenge_enemy.png"
        return "assets/enemy.png"


class Enemy:
    """An enemy that flies to its formation slot and later dives at the player."""

    def __init__(self, x, y, enemy_type, textures=None):
        manager = textures if textures is not None else shared_manager
        self.enemy_type = EnemyType(enemy_type)
        self.texture = manager.get_texture(self.enemy_type.texture_path)
        self.position = Vector2(x, SPAWN_Y)
        self.formation_position = Vector2(x, y)
        self.velocity = Vector2(0.0, 0.0)
        self.alive = True
        self.in_formation = False
        self.attacking = False
        self.has_captured_ship = False
        self.attack_time = 0.0
        self.attack_angle = 0.0
        log.debug(
            "Enemy created at position: %s, %s with texture: %s",
            x,
            SPAWN_Y,
            self.enemy_type.texture_path,
        )

    def update(self):
        """Advance the enemy by one frame."""
        if not self.in_formation and not self.attacking:
            self._move_to_formation()
        elif self.attacking:
            self._update_attack_pattern()

    def _move_to_formation(self):
        direction = self.formation_position - self.position
        distance = direction.length()
        if distance < SNAP_DISTANCE:
            self.position = Vector2(self.formation_position)
            self.in_formation = True
            return
        self.position += direction / distance * FORMATION_SPEED

    def start_attack(self):
        """Leave the formation and begin an attack run."""
        if self.in_formation:
            self.attacking = True
            self.in_formation = False
            self.attack_time = 0.0
            self.attack_angle = 0.0
            self.velocity = Vector2(0.0, 0.0)

    def _update_attack_pattern(self):
        self.attack_time += FRAME_TIME
        if self.enemy_type is EnemyType.BOSS and self.has_captured_ship:
            scale = 100.0
            self.attack_angle += 0.02
            self.velocity.x = scale * math.sin(2 * self.attack_angle)
            self.velocity.y = scale * math.sin(self.attack_angle)
        else:
            self.velocity.x = 200.0 * math.sin(self.attack_time)
            self.velocity.y = 150.0 * math.cos(self.attack_time * 0.5)

        self.position += self.velocity * FRAME_TIME

        x, y = self.position
        if y > ARENA_BOTTOM or y < ARENA_TOP or x < ARENA_LEFT or x > ARENA_RIGHT:
            if self.has_captured_ship:
                self.attacking = False
            else:
                self.alive = False

    def kill(self):
        self.alive = False

    def enter_formation(self):
        self.in_formation = True

    def can_capture(self):
        """True for a boss that holds no captured ship yet."""
        return self.enemy_type is EnemyType.BOSS and not self.has_captured_ship

    def point_value(self):
        """Score awarded for destroying this enemy."""
        if self.enemy_type is EnemyType.BOSS:
            return 1000 if self.has_captured_ship else 500
        if self.enemy_type is EnemyType.CHALLENGING:
            return 300
        return 100

    def bounds(self):
        """Return the rectangle the enemy covers."""
        width, height = self.texture.get_size()
        return pygame.Rect(
            math.floor(self.position.x), math.floor(self.position.y), width, height
        )

    def draw(self, surface):
        """Blit the enemy onto ``surface``."""
        surface.blit(self.texture, (self.position.x, self.position.y))