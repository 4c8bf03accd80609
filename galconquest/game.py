"""The game loop: stages, scoring, collisions and screen drawing."""

from __future__ import annotations

import argparse
import dataclasses
import enum
import logging
import random
import time

import pygame
from pygame.math import Vector2

from galconquest.bullet import BULLET_TEXTURE, Bullet
from galconquest.enemy import Enemy, EnemyType
from galconquest.menu import Menu, MenuState
from galconquest.player import Player
from galconquest.settings import Settings, key_of
from galconquest.textures import shared_manager

log = logging.getLogger(__name__)

TITLE = "Galactical Conquest"
SCREEN_SIZE = (800, 600)
SCREEN_HEIGHT = 600.0
CENTRE_X = 400
FPS = 60

BACKGROUND_TEXTURE = "assets/background.png"
FORMATION_ROWS = 5
FORMATION_COLS = 8
FORMATION_SPACING = 50.0
FORMATION_OFFSET_X = 200.0
FORMATION_OFFSET_Y = 100.0
CHALLENGING_ENEMIES = 20
CHALLENGING_SPACING = 40.0
CHALLENGING_DURATION = 30.0
ATTACK_INTERVAL = 1.0
BULLET_EXIT_Y = -10.0
RESCUE_BONUS = 1000

HUD_SIZE = 24
STAGE_TEXT_SIZE = 32
GAME_OVER_SIZE = 40
CHALLENGE_TEXT_SIZE = 40
GAME_OVER_MESSAGE = "Game Over! Press Enter to continue"
ABOUT_LINES = (
    TITLE,
    "Version 1.0",
    "A Galaga-style space shooter game",
)

WHITE = pygame.Color(255, 255, 255)
RED = pygame.Color(255, 0, 0)
BLACK = pygame.Color(0, 0, 0)


class GameState(enum.Enum):
    MENU = "menu"
    PLAYING = "playing"
    CHALLENGING = "challenging"
    GAME_OVER = "game_over"


@dataclasses.dataclass
class FormationSlot:
    position: Vector2
    occupied: bool
    enemy_type: EnemyType


def _key_down(pressed, key):
    try:
        return bool(pressed[key])
    except (KeyError, IndexError):
        return False


def _contains(rect, point):
    x, y = point
    return rect.left <= x < rect.right and rect.top <= y < rect.bottom


class Game:
    """Owns every object of a running game and steps it frame by frame.

    ``surface`` is drawn on; when it is omitted a window is opened.
    ``clock`` returns the current time in seconds and ``rng`` supplies
    the randomness for spawn positions and attack choices.
    """

    def __init__(self, surface=None, textures=None, rng=None, clock=None):
        self.textures = textures if textures is not None else shared_manager
        self._rng = rng if rng is not None else random.Random()
        self._clock = clock if clock is not None else time.monotonic
        self._owns_window = surface is None
        if surface is None:
            surface = pygame.display.set_mode(SCREEN_SIZE)
            pygame.display.set_caption(TITLE)
        self.window = surface

        self.background = self.textures.get_texture(BACKGROUND_TEXTURE)
        self._bullet_texture = self.textures.get_texture(BULLET_TEXTURE)
        self.bg_y = 0.0

        self.player = self._new_player()
        self.enemies: list[Enemy] = []
        self.bullets: list[Bullet] = []
        self.formation_slots: list[FormationSlot] = []
        self.menu = Menu(self.textures)
        self.settings = Settings(self.textures)
        self.state = GameState.MENU
        self.stage = 1
        self.score = 0
        self.high_score = 0
        self.enemies_in_formation = 0
        self.running = True
        self.about_visible = False

        now = self._clock()
        self._stage_start = now
        self._attack_start = now
        self._game_start = now
        self._stage_text_pos = None
        self._game_over_pos = None
        log.debug("Game constructor completed successfully")

    def _new_player(self):
        player = Player(self.textures)
        player.reset_shoot_clock(self._clock())
        return player

    def run(self):
        """Run the event, update and draw loop until the window closes."""
        frame_clock = pygame.time.Clock()
        while self.running:
            for event in pygame.event.get():
                self.handle_event(event)
            if not self.running:
                break
            self.update(pygame.key.get_pressed())
            self.render()
            pygame.display.flip()
            frame_clock.tick(FPS)

    def new_game(self):
        """Start over from stage 1 with a fresh ship and no score."""
        self.state = GameState.PLAYING
        self.stage = 1
        self.score = 0
        self.enemies.clear()
        self.bullets.clear()
        self.player = self._new_player()
        self._start_new_stage()
        log.info("New game started!")

    def show_preferences(self):
        """Open the settings dialog."""
        self.settings.show()

    def show_about_panel(self):
        """Show the about information until the next key press."""
        self.about_visible = True

    def handle_event(self, event):
        """React to one pygame event."""
        if event.type == pygame.QUIT:
            self.running = False
            return

        if self.about_visible and key_of(event) is not None:
            self.about_visible = False
            return

        if self.settings.visible and self.settings.handle_input(event):
            return

        if self.state is GameState.MENU:
            self.menu.handle_input(event)
            if self.menu.state is MenuState.GAME:
                self.state = GameState.PLAYING
                self._start_new_stage()
            elif self.menu.state is MenuState.EXIT:
                self.running = False
        elif self.state is GameState.GAME_OVER:
            if key_of(event) == pygame.K_RETURN:
                self.state = GameState.MENU
                self.menu = Menu(self.textures)

    def update(self, pressed):
        """Advance the game by one frame with the keyboard state ``pressed``."""
        if self.state is GameState.MENU:
            self.menu.update()
            return
        if self.state is GameState.GAME_OVER:
            return
        if not self.player.is_alive():
            log.info("Player died! Transitioning to GAME_OVER state")
            self.state = GameState.GAME_OVER
            return
        if self.state is GameState.PLAYING:
            self._update_formation()
        else:
            self._update_challenging()

        self.player.update()
        self.player.handle_input(pressed)

        now = self._clock()
        if self.player.can_shoot(now) and _key_down(pressed, pygame.K_SPACE):
            half_width = self.player.texture.get_width() // 2
            position = self.player.position
            self.bullets.append(
                Bullet(position.x + half_width, position.y, texture=self._bullet_texture)
            )
            if self.player.has_dual:
                dual = self.player.dual_position
                self.bullets.append(
                    Bullet(dual.x + half_width, dual.y, texture=self._bullet_texture)
                )
            self.player.reset_shoot_clock(now)

        for bullet in self.bullets:
            bullet.update()
        self.bullets = [b for b in self.bullets if b.position.y >= BULLET_EXIT_Y]

        for enemy in self.enemies:
            enemy.update()

        if (
            self.state is GameState.PLAYING
            and now - self._attack_start > ATTACK_INTERVAL
            and self.enemies
        ):
            chosen = self.enemies[self._rng.randrange(len(self.enemies))]
            if chosen.in_formation:
                chosen.start_attack()
                self._attack_start = now

        self._check_collisions()
        self.enemies = [e for e in self.enemies if e.alive]

        self.bg_y += 1.0
        if self.bg_y >= SCREEN_HEIGHT:
            self.bg_y = 0.0

    def render(self):
        """Draw the current frame onto the window surface."""
        surface = self.window
        surface.fill(BLACK)
        surface.blit(self.background, (0, self.bg_y - SCREEN_HEIGHT))

        if self.state is GameState.MENU:
            self.menu.render(surface)
        else:
            self.player.draw(surface)
            for enemy in self.enemies:
                if enemy.alive:
                    enemy.draw(surface)
            for bullet in self.bullets:
                bullet.draw(surface)
            self._render_hud()
            if self.state is GameState.GAME_OVER:
                text = self._text(GAME_OVER_MESSAGE, GAME_OVER_SIZE, RED)
                pos = self._game_over_pos or (
                    round(CENTRE_X - text.get_width() / 2),
                    250,
                )
                surface.blit(text, pos)

        if self.settings.visible:
            self.settings.render(surface)
        if self.about_visible:
            self._render_about()

    def apply_settings(self):
        """Apply the dialog's display mode and restart from stage 1."""
        if self._owns_window:
            if self.settings.fullscreen:
                self.window = pygame.display.set_mode((0, 0), pygame.FULLSCREEN)
            else:
                self.window = pygame.display.set_mode(SCREEN_SIZE)
            pygame.display.set_caption(TITLE)

        self.stage = 1
        now = self._clock()
        self._stage_start = now
        self._attack_start = now
        self._game_start = now

        self.enemies.clear()
        self.bullets.clear()
        self.formation_slots.clear()
        self.player = self._new_player()

        self._stage_text_pos = (10, 70)
        self._game_over_pos = (400, 300)

    def _spawn_formation(self):
        self.formation_slots.clear()
        self.enemies.clear()
        self.enemies_in_formation = 0
        for row in range(FORMATION_ROWS):
            if row == 0:
                enemy_type = EnemyType.BOSS
            elif row < 3:
                enemy_type = EnemyType.CHALLENGING
            else:
                enemy_type = EnemyType.BASIC
            for col in range(FORMATION_COLS):
                slot = FormationSlot(
                    Vector2(
                        FORMATION_OFFSET_X + col * FORMATION_SPACING,
                        FORMATION_OFFSET_Y + row * FORMATION_SPACING,
                    ),
                    True,
                    enemy_type,
                )
                self.formation_slots.append(slot)
                enemy = Enemy(
                    -50.0 + self._rng.randrange(100), -50.0, enemy_type, self.textures
                )
                enemy.formation_position = Vector2(slot.position)
                self.enemies.append(enemy)

    def _spawn_challenging_stage(self):
        self.enemies.clear()
        self.enemies_in_formation = 0
        self.enemies.extend(
            Enemy(i * CHALLENGING_SPACING, -50.0, EnemyType.CHALLENGING, self.textures)
            for i in range(CHALLENGING_ENEMIES)
        )
        self.state = GameState.CHALLENGING
        self._stage_start = self._clock()

    def _update_formation(self):
        self.enemies_in_formation = sum(1 for e in self.enemies if e.in_formation)
        if not self.enemies:
            self.stage += 1
            self._start_new_stage()

    def _update_challenging(self):
        elapsed = self._clock() - self._stage_start
        if elapsed > CHALLENGING_DURATION or not self.enemies:
            self.stage += 1
            self._start_new_stage()

    def _check_collisions(self):
        remaining = []
        for bullet in self.bullets:
            rect = bullet.bounds()
            target = next(
                (e for e in self.enemies if e.alive and _contains(rect, e.position)),
                None,
            )
            if target is None:
                remaining.append(bullet)
                continue
            log.debug("Bullet hit enemy!")
            if target.has_captured_ship:
                log.info("Rescued captured ship!")
                self.player.rescue()
                self._update_score(RESCUE_BONUS)
            target.kill()
            self._update_score(target.point_value())
        self.bullets = remaining

        if not self.player.is_alive() or self.player.captured:
            return
        player_rect = self.player.bounds()
        for enemy in self.enemies:
            if not enemy.alive:
                continue
            if _contains(player_rect, enemy.position) or _contains(
                enemy.bounds(), self.player.position
            ):
                if enemy.enemy_type is EnemyType.BOSS and enemy.can_capture():
                    log.info("Boss captured player!")
                    self._handle_capture(enemy)
                else:
                    self.player.damage(1)
                    log.info("Player health after damage: %s", self.player.health)
                break

    def _handle_capture(self, boss):
        self.player.capture()
        boss.has_captured_ship = True

    def _start_new_stage(self):
        log.info("Starting new stage: %s", self.stage)
        if self.stage % 3 == 0:
            self._spawn_challenging_stage()
            self.state = GameState.CHALLENGING
        else:
            self._spawn_formation()
            self.state = GameState.PLAYING
        self._stage_text_pos = None
        log.info("Enemies spawned: %s", len(self.enemies))

    def _update_score(self, points):
        self.score += points
        if self.score > self.high_score:
            self.high_score = self.score

    def _text(self, label, size, colour):
        return self.textures.get_font(size).render(label, True, colour)

    def _render_hud(self):
        surface = self.window
        font = self.textures.get_font(HUD_SIZE)
        lines = (f"Score: {self.score}", f"High Score: {self.high_score}")
        for index, line in enumerate(lines):
            surface.blit(
                font.render(line, True, WHITE), (10, 10 + index * font.get_linesize())
            )
        surface.blit(font.render(f"Lives: {self.player.health}", True, WHITE), (10, 40))

        stage_text = self._text(f"Stage {self.stage}", STAGE_TEXT_SIZE, WHITE)
        pos = self._stage_text_pos or (
            round(CENTRE_X - stage_text.get_width() / 2),
            300,
        )
        surface.blit(stage_text, pos)

        if self.state is GameState.CHALLENGING:
            surface.blit(
                self._text("Challenging Stage!", CHALLENGE_TEXT_SIZE, WHITE), (400, 50)
            )

    def _render_about(self):
        font = self.textures.get_font(HUD_SIZE)
        top = 220
        for index, line in enumerate(ABOUT_LINES):
            text = font.render(line, True, WHITE)
            self.window.blit(
                text,
                (
                    round(CENTRE_X - text.get_width() / 2),
                    top + index * font.get_linesize(),
                ),
            )


def main(argv=None):
    """Open the game window and play until it is closed."""
    parser = argparse.ArgumentParser(prog="galconquest", description=TITLE)
    parser.add_argument(
        "--assets-root",
        default=None,
        help="directory that holds the assets/ folder (default: current directory)",
    )
    args = parser.parse_args(argv)

    pygame.init()
    try:
        textures = None
        if args.assets_root is not None:
            from galconquest.textures import TextureManager

            textures = TextureManager(root=args.assets_root)
        game = Game(textures=textures)
        game.run()
    finally:
        pygame.quit()
    return 0