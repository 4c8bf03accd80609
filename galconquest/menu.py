"""Title screen with the main menu and its settings page."""

from __future__ import annotations

import enum
import logging

import pygame

from galconquest.settings import (
    CONFIRM_KEYS,
    DEFAULT_VOLUME,
    WHITE,
    YELLOW,
    key_of,
    option_labels,
    render_bold,
    step_volume,
)
from galconquest.textures import shared_manager

log = logging.getLogger(__name__)

BACKGROUND_TEXTURE = "assets/background.png"
TITLE = "Galactical Conquest"
TITLE_SIZE = 72
TITLE_Y = 100
ITEM_SIZE = 36
ITEM_SPACING = 80
ITEM_START_Y = 300
CENTRE_X = 400

MAIN_MENU_ITEMS = ("Play Game", "Settings", "Exit")


class MenuState(enum.Enum):
    MAIN_MENU = "main_menu"
    SETTINGS = "settings"
    GAME = "game"
    EXIT = "exit"


class Menu:
    """The title menu: start a game, change settings or quit."""

    def __init__(self, textures=None):
        self._textures = textures if textures is not None else shared_manager
        self.state = MenuState.MAIN_MENU
        self.selected = 0
        self.music_volume = DEFAULT_VOLUME
        self.sound_volume = DEFAULT_VOLUME
        self.fullscreen = False
        self.background = self._textures.get_texture(BACKGROUND_TEXTURE)
        log.debug("Menu initialized")

    def items(self):
        """Return the labels of the page currently shown."""
        if self.state is MenuState.SETTINGS:
            return option_labels(
                self.music_volume, self.sound_volume, self.fullscreen, "Back"
            )
        return list(MAIN_MENU_ITEMS)

    def _open_main_menu(self):
        self.state = MenuState.MAIN_MENU
        self.selected = 0

    def _open_settings(self):
        self.state = MenuState.SETTINGS
        self.selected = 0

    def handle_input(self, event):
        """React to a key press."""
        key = key_of(event)
        if key is None:
            return

        if key == pygame.K_UP:
            if self.selected > 0:
                self.selected -= 1
        elif key == pygame.K_DOWN:
            if self.selected < len(self.items()) - 1:
                self.selected += 1
        elif key in CONFIRM_KEYS:
            self._confirm()
        elif key in (pygame.K_LEFT, pygame.K_RIGHT):
            if self.state is MenuState.SETTINGS:
                self._adjust(1 if key == pygame.K_RIGHT else -1)

    def _confirm(self):
        if self.state is MenuState.MAIN_MENU:
            if self.selected == 0:
                self.state = MenuState.GAME
            elif self.selected == 1:
                self._open_settings()
            elif self.selected == 2:
                self.state = MenuState.EXIT
        elif self.state is MenuState.SETTINGS:
            if self.selected == len(self.items()) - 1:
                self._open_main_menu()

    def _adjust(self, direction):
        if self.selected == 0:
            self.music_volume = step_volume(self.music_volume, direction)
        elif self.selected == 1:
            self.sound_volume = step_volume(self.sound_volume, direction)
        elif self.selected == 2:
            self.fullscreen = not self.fullscreen
        # Rebuilding the settings page puts the cursor back on the first line.
        self._open_settings()

    def update(self):
        """The menu has no animations."""

    def render(self, surface):
        """Draw the background, title and items onto ``surface``."""
        surface.blit(self.background, (0, 0))

        title = render_bold(self._textures.get_font(TITLE_SIZE), TITLE, YELLOW)
        surface.blit(title, (round(CENTRE_X - title.get_width() / 2), TITLE_Y))

        font = self._textures.get_font(ITEM_SIZE)
        for index, label in enumerate(self.items()):
            colour = YELLOW if index == self.selected else WHITE
            text = font.render(label, True, colour)
            surface.blit(
                text,
                (
                    round(CENTRE_X - text.get_width() / 2),
                    ITEM_START_Y + index * ITEM_SPACING,
                ),
            )