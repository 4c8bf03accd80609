"""In-game settings dialog for volumes and fullscreen mode."""

from __future__ import annotations

import pygame

from galconquest.textures import shared_manager

VOLUME_STEP = 10.0
MIN_VOLUME = 0.0
MAX_VOLUME = 100.0
DEFAULT_VOLUME = 50.0

PANEL_RECT = pygame.Rect(100, 100, 600, 400)
PANEL_FILL = (0, 0, 0, 200)
OUTLINE_THICKNESS = 2
TITLE = "Settings"
TITLE_SIZE = 36
ITEM_SIZE = 24
ITEM_SPACING = 50
ITEM_OFFSET_Y = 100
TITLE_OFFSET_Y = 20

YELLOW = pygame.Color(255, 255, 0)
WHITE = pygame.Color(255, 255, 255)

CONFIRM_KEYS = (pygame.K_RETURN, pygame.K_SPACE)


def option_labels(music_volume, sound_volume, fullscreen, last):
    """Return the labels of the option list, ending with ``last``."""
    return [
        f"Music Volume: {int(music_volume)}%",
        f"Sound Volume: {int(sound_volume)}%",
        f"Fullscreen: {'On' if fullscreen else 'Off'}",
        last,
    ]


def step_volume(volume, direction):
    """Move ``volume`` one step up (direction > 0) or down, within 0..100."""
    if direction > 0:
        return min(MAX_VOLUME, volume + VOLUME_STEP)
    return max(MIN_VOLUME, volume - VOLUME_STEP)


def key_of(event):
    """Return the key of a key-press event, or None for any other event."""
    if getattr(event, "type", None) != pygame.KEYDOWN:
        return None
    return getattr(event, "key", None)


def render_bold(font, text, colour):
    """Render ``text`` in bold without changing the shared font for others."""
    was_bold = font.get_bold()
    font.set_bold(True)
    try:
        return font.render(text, True, colour)
    finally:
        font.set_bold(was_bold)


class Settings:
    """A modal dialog drawn over the game to change volumes and fullscreen."""

    def __init__(self, textures=None, on_settings_changed=None):
        self._textures = textures if textures is not None else shared_manager
        self.visible = False
        self.music_volume = DEFAULT_VOLUME
        self.sound_volume = DEFAULT_VOLUME
        self.fullscreen = False
        self.selected = 0
        self.on_settings_changed = on_settings_changed

    def items(self):
        """Return the labels currently listed in the dialog."""
        return option_labels(
            self.music_volume, self.sound_volume, self.fullscreen, "Close"
        )

    def show(self):
        """Make the dialog visible."""
        self.visible = True

    def handle_input(self, event):
        """Handle a key event; return True if the dialog consumed it."""
        if not self.visible:
            return False
        key = key_of(event)
        if key is None:
            return False

        if key == pygame.K_ESCAPE:
            self.visible = False
            return True
        if key == pygame.K_UP:
            if self.selected > 0:
                self.selected -= 1
                return True
            return False
        if key == pygame.K_DOWN:
            if self.selected < len(self.items()) - 1:
                self.selected += 1
                return True
            return False
        if key in (pygame.K_LEFT, pygame.K_RIGHT):
            return self._adjust(1 if key == pygame.K_RIGHT else -1)
        if key in CONFIRM_KEYS:
            if self.selected == len(self.items()) - 1:
                self.visible = False
                return True
        return False

    def _adjust(self, direction):
        if self.selected == 0:
            self.music_volume = step_volume(self.music_volume, direction)
        elif self.selected == 1:
            self.sound_volume = step_volume(self.sound_volume, direction)
        elif self.selected == 2:
            self.fullscreen = not self.fullscreen
        else:
            return False
        if self.on_settings_changed is not None:
            self.on_settings_changed()
        return True

    def update(self):
        """The dialog has no per-frame state."""

    def render(self, surface):
        """Draw the dialog onto ``surface`` when it is visible."""
        if not self.visible:
            return

        panel = pygame.Surface(PANEL_RECT.size, pygame.SRCALPHA)
        panel.fill(PANEL_FILL)
        surface.blit(panel, PANEL_RECT.topleft)
        outline = PANEL_RECT.inflate(2 * OUTLINE_THICKNESS, 2 * OUTLINE_THICKNESS)
        pygame.draw.rect(surface, WHITE, outline, OUTLINE_THICKNESS)

        centre_x = PANEL_RECT.x + PANEL_RECT.width / 2
        title = render_bold(self._textures.get_font(TITLE_SIZE), TITLE, YELLOW)
        surface.blit(
            title,
            (round(centre_x - title.get_width() / 2), PANEL_RECT.y + TITLE_OFFSET_Y),
        )

        font = self._textures.get_font(ITEM_SIZE)
        start_y = PANEL_RECT.y + ITEM_OFFSET_Y
        for index, label in enumerate(self.items()):
            colour = YELLOW if index == self.selected else WHITE
            text = font.render(label, True, colour)
            surface.blit(
                text,
                (
                    round(centre_x - text.get_width() / 2),
                    start_y + index * ITEM_SPACING,
                ),
            )