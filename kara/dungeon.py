"""The main dungeon scene and the loading of a fresh dungeon."""

from dataclasses import dataclass
from typing import Any

from .ending import Ending
from .factory import load_entities_file
from .fog import FogOfWar
from .gamemap import GameMap, load_tile_images
from .hud import Hud
from .inventory import InventoryView
from .messagebox import MessageQueue
from .world import World


@dataclass
class Assets:
    """Resources shared by the scenes, and where the dungeon data lives."""

    atlas: Any = None
    font: Any = None
    sound: Any = None
    map_path: str = "data/map.data"
    entities_path: str = "data/entities.json"

    def image(self, filename):
        """Required atlas image, or None when no atlas is loaded."""
        if self.atlas is None:
            return None
        return self.atlas.get(filename, True)


def create_world(assets):
    """Load the map and entities into a new world."""
    game_map = GameMap.load(assets.map_path)
    game_map.decorate()
    tiles = load_tile_images(assets.atlas) if assets.atlas is not None else {}

    world = World(
        game_map=game_map,
        fog=FogOfWar(game_map.width, game_map.height, assets.image("gfx/misc/fogOfWarRect.png")),
        hud=Hud(assets.image("gfx/hud/inventorySlotFrame.png")),
        messages=MessageQueue(assets.image("gfx/misc/messageBoxArrow.png")),
        sound=assets.sound,
        atlas=assets.atlas,
        tiles=tiles,
    )
    load_entities_file(world, assets.entities_path)
    return world


class DungeonScene:
    """Exploring the dungeon: movement, dialogue and the HUD."""

    def __init__(self, app, world, assets):
        self.app = app
        self.world = world
        self.assets = assets
        self.inventory_arrow = assets.image("gfx/hud/inventoryArrow.png")

    def _resume(self):
        self.app.scene = self

    def logic(self):
        app = self.app
        world = self.world
        world.time += app.delta_time

        if not world.messages:
            if world.player.update(world, app.keyboard, app.delta_time):
                app.scene = InventoryView(
                    app, world, self._resume, self.inventory_arrow, self.assets.font
                )
        else:
            world.messages.update(app.delta_time, app.keyboard, world.sound)

        world.entities.remove_dead()
        world.hud.update(app.delta_time)

        if world.complete:
            app.scene = Ending(app, world, self.assets.font)

    def draw(self, renderer):
        world = self.world
        world.game_map.draw(renderer, world.tiles, world.camera, world.render_offset)
        world.entities.draw(renderer, world.camera, world.render_offset)
        world.fog.draw(renderer, world.camera, world.render_offset)
        font = self.assets.font
        if font is not None:
            world.hud.draw(renderer, font, world.player)
            world.messages.draw(renderer, font)