from dataclasses import dataclass

import pytest

from kara.defs import MAP_RENDER_HEIGHT, MAP_RENDER_WIDTH, TILE_DARK, TILE_GROUND, TILE_WALL
from kara.fog import FogOfWar
from kara.gamemap import GameMap

SIZE = 21


@dataclass(eq=False)
class Thing:
    x: int
    y: int
    solid: bool = True


class FakeRenderer:
    def __init__(self):
        self.blits = []

    def blit_atlas_image(self, image, x, y, center=False, flip=False, alpha=255):
        self.blits.append((image, x, y, alpha))


def open_map(tile=TILE_GROUND):
    game_map = GameMap(SIZE, SIZE)
    for x in range(SIZE):
        for y in range(SIZE):
            game_map[x, y] = tile
    return game_map


def test_fresh_fog_is_dark():
    fog = FogOfWar(SIZE, SIZE)
    assert fog.light_level(0, 0) == 0
    with pytest.raises(IndexError):
        fog.light_level(SIZE, 0)


def test_source_and_neighbours_fully_lit():
    fog = FogOfWar(SIZE, SIZE)
    src = Thing(10, 10)
    fog.update(src, 8, open_map(), [src])
    assert fog.light_level(10, 10) == 255
    assert fog.light_level(11, 10) == 255
    assert fog.light_level(10, 9) == 255


def test_light_fades_with_distance():
    fog = FogOfWar(SIZE, SIZE)
    src = Thing(10, 10)
    fog.update(src, 8, open_map(), [src])
    levels = [fog.light_level(10 + d, 10) for d in range(1, 9)]
    assert all(a >= b for a, b in zip(levels, levels[1:]))
    assert levels[0] > levels[-1]


def test_cells_beyond_distance_stay_dark():
    fog = FogOfWar(SIZE, SIZE)
    src = Thing(10, 10)
    fog.update(src, 3, open_map(), [src])
    assert fog.light_level(14, 10) == 0
    assert fog.light_level(10, 0) == 0


def test_wall_blocks_sight():
    game_map = open_map()
    game_map[12, 10] = TILE_WALL
    fog = FogOfWar(SIZE, SIZE)
    src = Thing(10, 10)
    fog.update(src, 8, game_map, [src])
    assert fog.light_level(12, 10) > 0
    assert fog.light_level(13, 10) == 0


def test_solid_entity_blocks_sight_but_not_itself():
    game_map = open_map()
    blocker = Thing(12, 10)
    src = Thing(10, 10)
    fog = FogOfWar(SIZE, SIZE)
    fog.update(src, 8, game_map, [src, blocker])
    assert fog.light_level(12, 10) > 0
    assert fog.light_level(14, 10) == 0


def test_non_solid_entity_does_not_block():
    src = Thing(10, 10)
    fog = FogOfWar(SIZE, SIZE)
    fog.update(src, 8, open_map(), [src, Thing(12, 10, solid=False)])
    assert fog.light_level(14, 10) > 0


def test_darkness_needs_lantern():
    dark = open_map(TILE_DARK)
    src = Thing(10, 10)

    without = FogOfWar(SIZE, SIZE)
    without.update(src, 8, dark, [src])
    assert without.light_level(10, 10) == 0
    assert without.light_level(11, 10) == 0

    with_lantern = FogOfWar(SIZE, SIZE)
    with_lantern.update(src, 8, dark, [src], has_lantern=True)
    assert with_lantern.light_level(10, 10) == 255
    assert with_lantern.light_level(13, 10) > 0


def test_update_keeps_brightest_level():
    fog = FogOfWar(SIZE, SIZE)
    game_map = open_map()
    first = Thing(5, 10)
    fog.update(first, 8, game_map, [first])
    before = fog.light_level(5, 10)
    second = Thing(12, 10)
    fog.update(second, 8, game_map, [second])
    assert fog.light_level(5, 10) == before
    assert fog.light_level(12, 10) == 255


def test_draw_alpha_is_inverse_of_light():
    image = object()
    fog = FogOfWar(SIZE, SIZE, image)
    src = Thing(0, 0)
    fog.update(src, 8, open_map(), [src])
    renderer = FakeRenderer()
    fog.draw(renderer, (0, 0), (3, 4))
    assert len(renderer.blits) == MAP_RENDER_WIDTH * MAP_RENDER_HEIGHT
    assert renderer.blits[0] == (image, 3, 4, 0)
    for _, _, _, alpha in renderer.blits:
        assert 0 <= alpha <= 255


def test_draw_skips_cells_off_map():
    fog = FogOfWar(5, 5, object())
    renderer = FakeRenderer()
    fog.draw(renderer, (0, 0), (0, 0))
    assert len(renderer.blits) == 25
    assert all(alpha == 255 for *_, alpha in renderer.blits)