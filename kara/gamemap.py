"""Tile map of the dungeon."""

import random
import re

from .defs import (
    MAP_HEIGHT,
    MAP_RENDER_HEIGHT,
    MAP_RENDER_WIDTH,
    MAP_WIDTH,
    MAX_TILES,
    TILE_DARK,
    TILE_GROUND,
    TILE_HOLE,
    TILE_SIZE,
    TILE_WALL,
)
from .util import read_file

DECORATION_SEED = 144893

_LEADING_INT = re.compile(r"[ \t\n\v\f\r]*([+-]?\d+)", re.ASCII)


def _atoi(text, pos):
    match = _LEADING_INT.match(text, pos)
    return int(match.group(1)) if match else 0


class GameMap:
    """A grid of tile numbers, addressed as map[x, y]."""

    def __init__(self, width=MAP_WIDTH, height=MAP_HEIGHT):
        self.width = width
        self.height = height
        self._tiles = [[TILE_HOLE] * height for _ in range(width)]

    @classmethod
    def parse(cls, text, width=MAP_WIDTH, height=MAP_HEIGHT):
        """Read space-separated tile numbers, row by row."""
        game_map = cls(width, height)
        count = width * height
        pos = 0
        for index in range(count):
            y, x = divmod(index, width)
            game_map._tiles[x][y] = _atoi(text, pos)
            if index + 1 < count:
                pos = text.find(" ", pos + 1)
                if pos < 0:
                    raise ValueError(f"map data ends after {index + 1} of {count} tiles")
        return game_map

    @classmethod
    def load(cls, filename="data/map.data"):
        """Load the dungeon map file."""
        return cls.parse(read_file(filename), MAP_WIDTH, MAP_HEIGHT)

    def in_bounds(self, x, y):
        return 0 <= x < self.width and 0 <= y < self.height

    def _check(self, pos):
        x, y = pos
        if not self.in_bounds(x, y):
            raise IndexError(f"tile ({x}, {y}) is outside the map")
        return x, y

    def __getitem__(self, pos):
        x, y = self._check(pos)
        return self._tiles[x][y]

    def __setitem__(self, pos, value):
        x, y = self._check(pos)
        self._tiles[x][y] = value

    def is_walkable(self, x, y):
        """Ground or dark floor that can be stepped on."""
        return TILE_GROUND <= self[x, y] < TILE_WALL

    def is_dark(self, x, y):
        """Floor that blocks sight without a lantern."""
        return TILE_DARK <= self[x, y] < TILE_WALL

    def is_wall(self, x, y):
        return self[x, y] >= TILE_WALL

    def decorate(self, seed=DECORATION_SEED):
        """Vary floor and wall tiles with a fixed-seed random pattern."""
        rng = random.Random(seed)
        for column in self._tiles:
            for y, tile in enumerate(column):
                if tile in (TILE_GROUND, TILE_DARK) and rng.randrange(5) == 0:
                    tile += 1 + rng.randrange(4)
                if tile == TILE_WALL:
                    tile += rng.randrange(6)
                column[y] = tile

    def draw(self, renderer, tiles, camera, offset):
        """Draw the tiles in view; ``camera`` and ``offset`` are (x, y) pairs."""
        cam_x, cam_y = (int(v) for v in camera)
        off_x, off_y = (int(v) for v in offset)
        for y in range(MAP_RENDER_HEIGHT):
            for x in range(MAP_RENDER_WIDTH):
                mx = cam_x + x
                my = cam_y + y
                if not self.in_bounds(mx, my):
                    continue
                tile = self._tiles[mx][my]
                if tile <= TILE_HOLE:
                    continue
                image = tiles.get(tile)
                if image is not None:
                    renderer.blit_atlas_image(
                        image, x * TILE_SIZE + off_x, y * TILE_SIZE + off_y, False
                    )


def load_tile_images(atlas):
    """Map each tile number to its atlas image, or None where there is none."""
    return {
        number: atlas.get(f"gfx/tiles/{number}.png", required=False)
        for number in range(1, MAX_TILES + 1)
    }