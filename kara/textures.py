"""Cache of textures loaded from image files."""

import logging

import pygame

log = logging.getLogger(__name__)


def to_texture(surface):
    """Prepare a surface for fast drawing on the current display."""
    if pygame.display.get_init() and pygame.display.get_surface() is not None:
        return surface.convert_alpha()
    return surface


class TextureCache:
    """Loads each image file once and hands back the cached texture."""

    def __init__(self, loader=None):
        self._loader = loader if loader is not None else pygame.image.load
        self._textures = {}

    def load(self, filename):
        """Return the texture for ``filename``, loading it on first use."""
        if filename not in self._textures:
            log.info("Loading %s ...", filename)
            self._textures[filename] = self._loader(filename)
        return self._textures[filename]

    def __len__(self):
        return len(self._textures)