"""Shared cache of loaded images and fonts."""

from __future__ import annotations

import logging
import os
import threading

import pygame

log = logging.getLogger(__name__)

DEFAULT_FONT_PATHS = (
    "/System/Library/Fonts/Supplemental/Arial.ttf",
    "/System/Library/Fonts/Helvetica.ttc",
    "/Library/Fonts/Arial.ttf",
    "assets/fonts/arial.ttf",
    "C:/Windows/Fonts/arial.ttf",
)
DEFAULT_FONT_SIZE = 24


class TextureManager:
    """Loads images and fonts once and hands out the cached objects.

    Relative file names are resolved against ``root`` when it is given.
    A texture that cannot be loaded is replaced by a 1x1 white surface.
    """

    def __init__(self, root=None, font_paths=DEFAULT_FONT_PATHS):
        self.root = None if root is None else os.fspath(root)
        self.font_paths = tuple(font_paths)
        self._empty = None
        self._textures: dict[str, pygame.Surface] = {}
        self._texture_lock = threading.RLock()
        self._default_fonts: dict[int, pygame.font.Font] = {}
        self._fonts: dict[tuple[str, int], pygame.font.Font] = {}
        self._font_lock = threading.RLock()

    def _resolve(self, filename):
        if self.root is None:
            return filename
        return os.path.join(self.root, filename)

    def empty_texture(self):
        """Return the shared 1x1 white surface."""
        with self._texture_lock:
            if self._empty is None:
                surface = pygame.Surface((1, 1))
                surface.fill(pygame.Color("white"))
                self._empty = surface
            return self._empty

    def get_texture(self, filename):
        """Return the image stored in ``filename``, loading it on first use."""
        with self._texture_lock:
            cached = self._textures.get(filename)
            if cached is not None:
                return cached
            try:
                surface = pygame.image.load(self._resolve(filename))
            except (OSError, pygame.error) as exc:
                log.error("Failed to load texture: %s (%s)", filename, exc)
                return self.empty_texture()
            self._textures[filename] = surface
            log.info("Loaded texture: %s", filename)
            return surface

    def clear_textures(self):
        """Forget every cached texture."""
        with self._texture_lock:
            self._textures.clear()

    def _default_font(self, size):
        cached = self._default_fonts.get(size)
        if cached is not None:
            return cached
        font = None
        for path in self.font_paths:
            try:
                font = pygame.font.Font(self._resolve(path), size)
            except (OSError, pygame.error):
                continue
            log.info("Loaded font: %s", path)
            break
        if font is None:
            log.warning("No font file could be loaded; using the built-in font")
            font = pygame.font.Font(None, size)
        self._default_fonts[size] = font
        return font

    def get_font(self, size=DEFAULT_FONT_SIZE, filename=None):
        """Return a font of ``size`` points, from ``filename`` or the default."""
        with self._font_lock:
            if not pygame.font.get_init():
                pygame.font.init()
            if filename is None:
                return self._default_font(size)
            key = (filename, size)
            cached = self._fonts.get(key)
            if cached is not None:
                return cached
            try:
                font = pygame.font.Font(self._resolve(filename), size)
            except (OSError, pygame.error) as exc:
                log.error("Failed to load font: %s (%s)", filename, exc)
                return self._default_font(size)
            self._fonts[key] = font
            log.info("Loaded font: %s", filename)
            return font


shared_manager = TextureManager()