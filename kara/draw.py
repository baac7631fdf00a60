"""Drawing primitives on top of a pygame surface."""

import pygame


def _half(value):
    return int(value / 2)


def _rgba(color):
    if len(color) == 3:
        return (*color, 255)
    return tuple(color)


class Renderer:
    """Draws images and shapes onto a target surface."""

    CLEAR_COLOR = (8, 8, 8)

    def __init__(self, surface):
        self.surface = surface

    def prepare_scene(self):
        """Clear the frame."""
        self.surface.fill(self.CLEAR_COLOR)

    def present_scene(self):
        """Show the frame if drawing to the window."""
        if pygame.display.get_init() and pygame.display.get_surface() is self.surface:
            pygame.display.flip()

    def blit(self, texture, x, y, center=False):
        """Draw a whole texture at (x, y)."""
        w, h = texture.get_size()
        if center:
            x -= _half(w)
            y -= _half(h)
        self.surface.blit(texture, (x, y))

    def blit_atlas_image(self, image, x, y, center=False, flip=False, alpha=255):
        """Draw an atlas image, optionally centred, mirrored and faded."""
        source = image.texture.subsurface(image.rect)
        if flip:
            source = pygame.transform.flip(source, True, False)
        if alpha < 255:
            source = source.copy()
            source.set_alpha(max(0, int(alpha)))
        if center:
            x -= _half(image.rect.w)
            y -= _half(image.rect.h)
        self.surface.blit(source, (x, y))

    def blit_atlas_image_scaled(self, image, x, y, w, h, center=False):
        """Draw an atlas image stretched to w by h."""
        source = pygame.transform.scale(image.texture.subsurface(image.rect), (w, h))
        if center:
            x -= _half(w)
            y -= _half(h)
        self.surface.blit(source, (x, y))

    def _shape(self, x, y, w, h, color, width):
        r, g, b, a = _rgba(color)
        if a < 255:
            overlay = pygame.Surface((w, h), pygame.SRCALPHA)
            pygame.draw.rect(overlay, (r, g, b, a), pygame.Rect(0, 0, w, h), width)
            self.surface.blit(overlay, (x, y))
        else:
            pygame.draw.rect(self.surface, (r, g, b), pygame.Rect(x, y, w, h), width)

    def draw_rect(self, x, y, w, h, color):
        """Fill a rectangle, blending when alpha is below 255."""
        self._shape(x, y, w, h, color, 0)

    def draw_outline_rect(self, x, y, w, h, color):
        """Draw a one-pixel rectangle outline."""
        self._shape(x, y, w, h, color, 1)