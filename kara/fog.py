"""Fog of war: which map cells have been lit, and how brightly."""

from .defs import MAP_HEIGHT, MAP_RENDER_HEIGHT, MAP_RENDER_WIDTH, MAP_WIDTH, TILE_SIZE
from .util import get_distance

FULL_LIGHT = 255


class FogOfWar:
    """Remembered light level of each cell, raised by light sources."""

    def __init__(self, width=MAP_WIDTH, height=MAP_HEIGHT, rect_image=None):
        self.width = width
        self.height = height
        self.rect_image = rect_image
        self._light = [[0] * height for _ in range(width)]

    def _in_bounds(self, x, y):
        return 0 <= x < self.width and 0 <= y < self.height

    def light_level(self, x, y):
        """Light level of cell (x, y), 0 to 255."""
        if not self._in_bounds(x, y):
            raise IndexError(f"cell ({x}, {y}) is outside the fog map")
        return self._light[x][y]

    def update(self, src, vis_distance, game_map, entities, has_lantern=False):
        """Light the cells ``src`` can see within ``vis_distance``."""
        solid = {(e.x, e.y) for e in entities if e is not src and e.solid}
        for dy in range(-vis_distance, vis_distance + 1):
            for dx in range(-vis_distance, vis_distance + 1):
                mx = src.x + dx
                my = src.y + dy
                if not self._in_bounds(mx, my) or self._light[mx][my] >= FULL_LIGHT:
                    continue
                if not _has_los(src.x, src.y, mx, my, game_map, solid, has_lantern):
                    continue
                distance = get_distance(src.x, src.y, mx, my)
                if distance <= 1:
                    level = FULL_LIGHT
                else:
                    level = int(FULL_LIGHT - FULL_LIGHT * (distance / vis_distance))
                self._light[mx][my] = max(level, self._light[mx][my])

    def draw(self, renderer, camera, offset):
        """Shade the cells in view; ``camera`` and ``offset`` are (x, y) pairs."""
        if self.rect_image is None:
            return
        cam_x, cam_y = (int(v) for v in camera)
        off_x, off_y = (int(v) for v in offset)
        for y in range(MAP_RENDER_HEIGHT):
            for x in range(MAP_RENDER_WIDTH):
                mx = cam_x + x
                my = cam_y + y
                if self._in_bounds(mx, my):
                    alpha = FULL_LIGHT - self._light[mx][my]
                    renderer.blit_atlas_image(
                        self.rect_image,
                        x * TILE_SIZE + off_x,
                        y * TILE_SIZE + off_y,
                        False,
                        False,
                        alpha,
                    )


def _has_los(x1, y1, x2, y2, game_map, solid, has_lantern):
    """Walk a Bresenham line; darkness, walls and solid entities block it."""
    dx = abs(x2 - x1)
    dy = abs(y2 - y1)
    sx = 1 if x1 < x2 else -1
    sy = 1 if y1 < y2 else -1
    err = dx - dy

    if game_map.is_dark(x1, y1) and not has_lantern:
        return False

    while True:
        e2 = 2 * err
        if e2 > -dy:
            err -= dy
            x1 += sx
        if e2 < dx:
            err += dx
            y1 += sy

        if game_map.is_dark(x1, y1) and not has_lantern:
            return False
        if x1 == x2 and y1 == y2:
            return True
        if game_map.is_wall(x1, y1) or (x1, y1) in solid:
            return False